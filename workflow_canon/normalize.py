"""Recursive key sorting and JSON serialization for deterministic output."""

import json
from typing import Any


def normalize_obj(obj: Any) -> Any:
    """Recursively sort dictionary keys.

    List element order is preserved; each element is normalized on its own.

    Args:
        obj: Object to normalize (dict, list, or primitive)

    Returns:
        New object with sorted keys at every depth
    """
    if isinstance(obj, dict):
        return {k: normalize_obj(v) for k, v in sorted(obj.items(), key=lambda kv: kv[0])}
    elif isinstance(obj, list):
        return [normalize_obj(item) for item in obj]
    else:
        return obj


def normalize_json(obj: Any, indent: int = 2) -> str:
    """Serialize an already normalized object to JSON text.

    Produces:
    - indentation of ``indent`` spaces
    - unescaped non-ASCII characters
    - newline at EOF

    Key order is taken from the object as-is, so run it through the
    normalization pipeline first.

    Args:
        obj: Object to serialize
        indent: Spaces per indentation level

    Returns:
        JSON string with trailing newline
    """
    json_str = json.dumps(obj, indent=indent, ensure_ascii=False)
    if not json_str.endswith("\n"):
        json_str += "\n"
    return json_str
