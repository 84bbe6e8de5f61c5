"""Command-line entry point for workflow-canon."""

import argparse
from typing import Optional, Sequence

from workflow_canon import __version__, logger
from workflow_canon.commands.check import run_check
from workflow_canon.commands.sort_document import run_sort
from workflow_canon.exceptions import EXIT_FAILURE, WorkflowCanonError


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="workflow-canon",
        description=(
            "Normalize a workflow-definition JSON document: strip transient fields, "
            "sort keys and order groups, items, dependencies and tags."
        ),
    )
    parser.add_argument("file1", help="Reference document (loaded, not modified)")
    parser.add_argument("file2", help="Document to normalize")
    parser.add_argument(
        "-o", "--output",
        help="Output file (default: FILE2 with '_sorted' before the extension)",
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--stdout",
        action="store_true",
        help="Write the normalized document to stdout instead of a file",
    )
    mode.add_argument(
        "--check",
        action="store_true",
        help="Exit non-zero if FILE2 is not already normalized; write nothing",
    )

    parser.add_argument("--config", help="Path to a .workflow-canon.yaml config file")
    parser.add_argument("--indent", type=int, help="Spaces per indentation level (default: 2)")
    parser.add_argument("--suffix", help="Suffix for the default output file name")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the CLI.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Raises:
        SystemExit: With a non-zero status on failure
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logger.configure(verbose=args.verbose, quiet=args.quiet)

    try:
        if args.check:
            run_check(args)
        else:
            run_sort(args)
    except WorkflowCanonError as e:
        logger.critical(f"Error: {e}", exit_code=e.exit_code)
    except Exception as e:
        logger.critical(f"Unexpected error: {type(e).__name__}: {e}", exit_code=EXIT_FAILURE)


if __name__ == "__main__":
    main()
