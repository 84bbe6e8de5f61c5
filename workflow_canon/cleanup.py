"""Field cleanup for groups, items and dependencies.

Each entity kind has a ``CleanupProfile`` describing which keys are always
removed and which are removed only for null or falsy values.
"""

from dataclasses import dataclass
from typing import Any, Mapping

GROUP = "group"
ITEM = "item"
DEPENDENCY = "dependency"

ENTITY_KINDS = (GROUP, ITEM, DEPENDENCY)

# Fields shared by every entity kind
_COMMON_FIELDS = [
    "highRisk",
    "highRiskStatisticMethod",
    "highRiskStatisticPeriod",
    "highRiskThreshold",
    "statisticMethod",
    "statisticPeriod",
    "comment",
    "reason",
    "ignoreProcessingStateRegistry",
    "verboseMode",
    "disableManualExecution",
    "groupId",
    "forceLoad",
    "eagerScriptExecution",
    "useScripts",
]

ITEM_FIELDS = ["title", "sortOrder", *_COMMON_FIELDS]
DEPENDENCY_FIELDS = ["sortKey", "layoutPreset", "layoutSettings", *_COMMON_FIELDS]
GROUP_FIELDS = ["layoutPreset", "layoutSettings", *_COMMON_FIELDS]


@dataclass(frozen=True)
class CleanupProfile:
    """Removal rules for one entity kind."""
    remove: frozenset[str] = frozenset()
    drop_if_null: frozenset[str] = frozenset()
    drop_if_falsy: frozenset[str] = frozenset()

    def should_drop(self, key: str, value: Any) -> bool:
        """Check whether a key/value pair is removed by this profile."""
        if key in self.remove:
            return True
        if key in self.drop_if_null and value is None:
            return True
        if key in self.drop_if_falsy and not value:
            return True
        return False

    def extend(
        self,
        remove: frozenset[str] = frozenset(),
        keep: frozenset[str] = frozenset(),
        drop_if_null: frozenset[str] = frozenset(),
        drop_if_falsy: frozenset[str] = frozenset(),
    ) -> "CleanupProfile":
        """Return a copy with extra rules added and ``keep`` keys exempted."""
        return CleanupProfile(
            remove=(self.remove | remove) - keep,
            drop_if_null=(self.drop_if_null | drop_if_null) - keep,
            drop_if_falsy=(self.drop_if_falsy | drop_if_falsy) - keep,
        )


DEFAULT_PROFILES: dict[str, CleanupProfile] = {
    GROUP: CleanupProfile(
        remove=frozenset(GROUP_FIELDS),
        drop_if_null=frozenset({"description"}),
        drop_if_falsy=frozenset({"passActionsToChildren"}),
    ),
    ITEM: CleanupProfile(
        remove=frozenset(ITEM_FIELDS),
        drop_if_null=frozenset({"description"}),
    ),
    DEPENDENCY: CleanupProfile(
        remove=frozenset(DEPENDENCY_FIELDS),
        drop_if_null=frozenset({"description"}),
    ),
}


def clean_entity(
    entity: Any,
    kind: str,
    profiles: Mapping[str, CleanupProfile] | None = None,
) -> Any:
    """Remove transient fields from a single entity.

    Args:
        entity: Group, item or dependency mapping
        kind: One of GROUP, ITEM, DEPENDENCY
        profiles: Cleanup profiles by kind (defaults to DEFAULT_PROFILES)

    Returns:
        New dictionary without the profile's fields, or the input unchanged
        if it is not a dictionary
    """
    if not isinstance(entity, dict):
        return entity

    profile = (profiles or DEFAULT_PROFILES)[kind]
    return {k: v for k, v in entity.items() if not profile.should_drop(k, v)}


def _clean_sequence(
    value: Any,
    kind: str,
    profiles: Mapping[str, CleanupProfile] | None,
) -> Any:
    if not isinstance(value, list):
        return value
    return [clean_entity(entry, kind, profiles) for entry in value]


def clean_group(
    group: Any,
    profiles: Mapping[str, CleanupProfile] | None = None,
) -> Any:
    """Clean a group together with its items and dependencies.

    Args:
        group: Group mapping
        profiles: Cleanup profiles by kind (defaults to DEFAULT_PROFILES)

    Returns:
        Cleaned copy of the group
    """
    cleaned = clean_entity(group, GROUP, profiles)
    if not isinstance(cleaned, dict):
        return cleaned

    if "items" in cleaned:
        cleaned["items"] = _clean_sequence(cleaned["items"], ITEM, profiles)
    if "dependencies" in cleaned:
        cleaned["dependencies"] = _clean_sequence(cleaned["dependencies"], DEPENDENCY, profiles)
    return cleaned
