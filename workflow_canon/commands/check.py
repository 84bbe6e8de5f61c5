"""Check command implementation."""

import argparse
from pathlib import Path

from workflow_canon import logger
from workflow_canon.commands.sort_document import load_reference, normalize_file
from workflow_canon.config import load_settings
from workflow_canon.exceptions import EXIT_NOT_NORMALIZED
from workflow_canon.normalize import normalize_json


def run_check(args: argparse.Namespace) -> None:
    """Verify that a document is already normalized.

    Nothing is written.

    Args:
        args: CLI arguments

    Raises:
        SystemExit: If the document is not normalized
    """
    settings = load_settings(Path.cwd(), args)
    reference_path = Path(args.file1)
    target_path = Path(args.file2)

    load_reference(reference_path)

    logger.info(f"Checking {target_path}")
    normalized, _ = normalize_file(target_path, settings)
    expected = normalize_json(normalized, indent=settings.indent)
    actual = target_path.read_text(encoding="utf-8")

    if actual.strip() != expected.strip():
        logger.critical(
            f"✗ {target_path} is not normalized (run without --check to fix)",
            exit_code=EXIT_NOT_NORMALIZED,
        )

    logger.info(f"✓ {target_path} is normalized")
