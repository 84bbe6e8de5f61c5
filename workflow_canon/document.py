"""Reading and writing workflow-definition documents."""

import json
from pathlib import Path
from typing import Any

from workflow_canon.exceptions import DocumentParseError, InputNotFoundError, OutputError
from workflow_canon.normalize import normalize_json

DEFAULT_SUFFIX = "_sorted"


def load_document(path: Path) -> Any:
    """Load and parse a JSON document.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed document

    Raises:
        InputNotFoundError: If the file does not exist or cannot be read
        DocumentParseError: If the file is not valid JSON
    """
    if not path.is_file():
        raise InputNotFoundError(f"File not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputNotFoundError(f"Failed to read {path}: {e}")

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentParseError(
            f"Invalid JSON in {path}: {e.msg} (line {e.lineno}, column {e.colno})",
            lineno=e.lineno,
            colno=e.colno,
        )


def write_document(document: Any, path: Path, indent: int = 2) -> None:
    """Serialize a normalized document to a file.

    Args:
        document: Normalized document
        path: Destination path
        indent: Spaces per indentation level

    Raises:
        OutputError: If the file cannot be written
    """
    try:
        path.write_text(normalize_json(document, indent=indent), encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to write {path}: {e}")


def default_output_path(path: Path, suffix: str = DEFAULT_SUFFIX) -> Path:
    """Derive the output path from the input path.

    ``flows/export.json`` becomes ``flows/export_sorted.json``.

    Args:
        path: Input file path
        suffix: Text inserted before the extension

    Returns:
        Output path in the same directory as the input
    """
    return path.with_name(f"{path.stem}{suffix}{path.suffix}")
