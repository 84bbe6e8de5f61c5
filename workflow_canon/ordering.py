"""Deterministic ordering of groups and their nested collections."""

from functools import lru_cache
from typing import Any

from pyuca import Collator

# Composite sort keys
ITEM_KEY = ("name",)
DEPENDENCY_KEY = ("dependencyType", "name", "workflowItem")
GROUP_KEY = ("domainClass", "id")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def ordered_key(entity: Any, *fields: str) -> tuple[str, ...]:
    """Extract a sort key from an entity.

    Missing or null fields become empty strings, as does every field of a
    non-dictionary entity.

    Args:
        entity: Mapping to read fields from
        *fields: Field names in priority order

    Returns:
        Tuple of strings, one per field
    """
    if not isinstance(entity, dict):
        return tuple("" for _ in fields)
    return tuple(_as_text(entity.get(f)) for f in fields)


@lru_cache(maxsize=None)
def _collator() -> Collator:
    return Collator()


def locale_sort_key(text: str) -> tuple[tuple[int, ...], str]:
    """Build a collation key for locale-aware string comparison.

    Uses the Unicode Collation Algorithm with the default table, so
    punctuation sorts before symbols, symbols before digits and digits before
    letters; accents and case (lowercase first) only break ties. The raw text
    is appended so that distinct strings never compare equal.

    Args:
        text: String to build the key for

    Returns:
        Tuple usable as a ``sorted`` key
    """
    return (_collator().sort_key(text), text)


def _sort_items(items: list[Any]) -> list[Any]:
    return sorted(items, key=lambda item: locale_sort_key(ordered_key(item, *ITEM_KEY)[0]))


def _sort_dependencies(dependencies: list[Any]) -> list[Any]:
    return sorted(dependencies, key=lambda dep: ordered_key(dep, *DEPENDENCY_KEY))


def _sort_tags(tags: list[Any]) -> list[Any]:
    return sorted(tags, key=_as_text)


def order_group(group: Any) -> Any:
    """Sort the items, dependencies and tags of a group in place.

    Fields that are absent or not lists are left untouched.

    Args:
        group: Group mapping

    Returns:
        The same group
    """
    if not isinstance(group, dict):
        return group

    if isinstance(group.get("items"), list):
        group["items"] = _sort_items(group["items"])
    if isinstance(group.get("dependencies"), list):
        group["dependencies"] = _sort_dependencies(group["dependencies"])
    if isinstance(group.get("tags"), list):
        group["tags"] = _sort_tags(group["tags"])
    return group


def order_groups(groups: list[Any]) -> list[Any]:
    """Order every group's collections, then the groups themselves.

    Group keys use plain string ordering, unlike item names which are
    compared with locale_sort_key.

    Args:
        groups: Top-level list of groups

    Returns:
        New list sorted by (domainClass, id)
    """
    for group in groups:
        order_group(group)
    return sorted(groups, key=lambda group: ordered_key(group, *GROUP_KEY))
