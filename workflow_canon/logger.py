"""Console logging for workflow-canon.

All messages go to stderr so that ``--stdout`` output stays clean.
"""

import logging
import sys
from typing import NoReturn

from workflow_canon.exceptions import EXIT_FAILURE

_logger = logging.getLogger("workflow_canon")


def configure(verbose: bool = False, quiet: bool = False) -> None:
    """Attach a stderr handler and set the log level.

    Args:
        verbose: Enable DEBUG output
        quiet: Only show warnings and errors
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    for handler in list(_logger.handlers):
        _logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    _logger.addHandler(handler)
    _logger.setLevel(level)
    _logger.propagate = False


def debug(msg: str) -> None:
    _logger.debug(msg)


def info(msg: str) -> None:
    _logger.info(msg)


def warning(msg: str) -> None:
    _logger.warning(msg)


def error(msg: str) -> None:
    _logger.error(msg)


def critical(msg: str, exit_code: int = EXIT_FAILURE) -> NoReturn:
    """Log a fatal message and terminate.

    Args:
        msg: Message to log
        exit_code: Process exit status

    Raises:
        SystemExit: Always
    """
    _logger.critical(msg)
    raise SystemExit(exit_code)
