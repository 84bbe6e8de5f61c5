"""Normalization pipeline: cleanup, key sorting, collection ordering."""

from dataclasses import dataclass
from typing import Any, Mapping

from workflow_canon.cleanup import CleanupProfile, clean_group
from workflow_canon.normalize import normalize_obj
from workflow_canon.ordering import order_groups


@dataclass
class NormalizeReport:
    """Counts collected while normalizing a document."""
    groups: int = 0
    items: int = 0
    dependencies: int = 0
    tags: int = 0
    removed_fields: int = 0


def _field_count(entity: Any) -> int:
    return len(entity) if isinstance(entity, dict) else 0


def _list_len(group: Any, key: str) -> int:
    if not isinstance(group, dict) or not isinstance(group.get(key), list):
        return 0
    return len(group[key])


def _removed_fields(original: Any, cleaned: Any) -> int:
    removed = _field_count(original) - _field_count(cleaned)
    if not isinstance(original, dict) or not isinstance(cleaned, dict):
        return removed
    for key in ("items", "dependencies"):
        before = original.get(key)
        after = cleaned.get(key)
        if isinstance(before, list) and isinstance(after, list):
            removed += sum(
                _field_count(b) - _field_count(a) for b, a in zip(before, after)
            )
    return removed


def normalize_document_with_report(
    document: Any,
    profiles: Mapping[str, CleanupProfile] | None = None,
) -> tuple[Any, NormalizeReport]:
    """Normalize a document and report what was processed.

    Args:
        document: Parsed JSON document (expected to be a list of groups)
        profiles: Cleanup profiles by entity kind

    Returns:
        Tuple of (normalized document, report). Non-list documents are
        returned unchanged with an empty report.
    """
    report = NormalizeReport()
    if not isinstance(document, list):
        return document, report

    cleaned_groups = []
    for group in document:
        cleaned = clean_group(group, profiles)
        report.removed_fields += _removed_fields(group, cleaned)
        cleaned_groups.append(cleaned)

    sorted_groups = normalize_obj(cleaned_groups)
    result = order_groups(sorted_groups)

    report.groups = len(result)
    for group in result:
        report.items += _list_len(group, "items")
        report.dependencies += _list_len(group, "dependencies")
        report.tags += _list_len(group, "tags")

    return result, report


def normalize_document(
    document: Any,
    profiles: Mapping[str, CleanupProfile] | None = None,
) -> Any:
    """Normalize a workflow-definition document.

    Strips transient fields, sorts keys recursively and orders groups,
    items, dependencies and tags. The input is not modified.

    Args:
        document: Parsed JSON document (expected to be a list of groups)
        profiles: Cleanup profiles by entity kind

    Returns:
        Normalized document, or the input unchanged if it is not a list
    """
    result, _ = normalize_document_with_report(document, profiles)
    return result
