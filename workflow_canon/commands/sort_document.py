"""Sort command implementation."""

import argparse
import sys
from pathlib import Path
from typing import Any

from workflow_canon import logger
from workflow_canon.config import Settings, load_settings
from workflow_canon.document import default_output_path, load_document, write_document
from workflow_canon.normalize import normalize_json
from workflow_canon.pipeline import NormalizeReport, normalize_document_with_report


def load_reference(path: Path) -> None:
    """Load the reference document.

    The reference is parsed so that a missing or malformed file is reported,
    but its content does not influence normalization.

    Args:
        path: Path to the reference file
    """
    reference = load_document(path)
    count = len(reference) if isinstance(reference, list) else 1
    logger.debug(f"Loaded reference document {path} ({count} top-level entr{'y' if count == 1 else 'ies'})")


def _log_report(report: NormalizeReport) -> None:
    """Log normalization summary.

    Args:
        report: Counts collected by the pipeline
    """
    logger.info(
        f"  {report.groups} group(s), {report.items} item(s), "
        f"{report.dependencies} dependenc{'y' if report.dependencies == 1 else 'ies'}, "
        f"{report.tags} tag(s)"
    )
    if report.removed_fields > 0:
        logger.info(f"  🗑  Removed {report.removed_fields} transient field(s)")


def normalize_file(path: Path, settings: Settings) -> tuple[Any, NormalizeReport]:
    """Load and normalize a document file.

    Args:
        path: Document to normalize
        settings: Runtime settings

    Returns:
        Tuple of (normalized document, report)
    """
    document = load_document(path)
    if not isinstance(document, list):
        logger.warning(f"⚠ {path} is not a list of groups; leaving content unchanged")
    return normalize_document_with_report(document, settings.profiles)


def run_sort(args: argparse.Namespace) -> None:
    """Normalize a document and write the result.

    Args:
        args: CLI arguments

    Raises:
        WorkflowCanonError: If a file cannot be read, parsed or written
    """
    settings = load_settings(Path.cwd(), args)
    reference_path = Path(args.file1)
    target_path = Path(args.file2)

    load_reference(reference_path)

    logger.info(f"Normalizing {target_path}")
    normalized, report = normalize_file(target_path, settings)
    _log_report(report)

    if args.stdout:
        sys.stdout.write(normalize_json(normalized, indent=settings.indent))
        return

    if args.output:
        output_path = Path(args.output)
    else:
        output_path = default_output_path(target_path, settings.output_suffix)

    write_document(normalized, output_path, indent=settings.indent)
    logger.info(f"✓ Saved to: {output_path}")
