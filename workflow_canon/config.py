"""Configuration management for workflow-canon."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from workflow_canon.cleanup import DEFAULT_PROFILES, ENTITY_KINDS, CleanupProfile
from workflow_canon.document import DEFAULT_SUFFIX
from workflow_canon.exceptions import ConfigError

CONFIG_FILENAME = ".workflow-canon.yaml"

_PROFILE_RULES = ("remove", "keep", "drop_if_null", "drop_if_falsy")


@dataclass
class Settings:
    """Runtime settings."""
    output_suffix: str = DEFAULT_SUFFIX
    indent: int = 2
    profiles: dict[str, CleanupProfile] = field(default_factory=lambda: dict(DEFAULT_PROFILES))


def load_settings(base_dir: Path, args: Optional[object] = None) -> Settings:
    """Load settings from multiple sources.

    Priority order:
    1. CLI flags (--config, --indent, --suffix)
    2. Environment variables (WORKFLOW_CANON_CONFIG, WORKFLOW_CANON_INDENT,
       WORKFLOW_CANON_SUFFIX)
    3. .workflow-canon.yaml in base_dir

    Args:
        base_dir: Directory searched for the default config file
        args: CLI arguments namespace

    Returns:
        Settings with defaults filled in

    Raises:
        ConfigError: If a config file is missing or invalid
    """
    config_path: Optional[Path] = None

    # Priority 1: CLI flag
    if args and getattr(args, "config", None):
        config_path = Path(args.config)
    # Priority 2: Environment variable
    elif os.getenv("WORKFLOW_CANON_CONFIG"):
        config_path = Path(os.environ["WORKFLOW_CANON_CONFIG"])

    if config_path is not None and not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    # Priority 3: default file
    if config_path is None and (base_dir / CONFIG_FILENAME).is_file():
        config_path = base_dir / CONFIG_FILENAME

    settings = Settings()
    if config_path is not None:
        settings = _parse_config_file(config_path)

    suffix = getattr(args, "suffix", None) if args else None
    source = "--suffix"
    if suffix is None:
        suffix = os.getenv("WORKFLOW_CANON_SUFFIX")
        source = "WORKFLOW_CANON_SUFFIX"
    if suffix is not None:
        settings.output_suffix = _parse_suffix(suffix, source)

    indent = getattr(args, "indent", None) if args else None
    if indent is not None:
        indent = _parse_indent(indent, "--indent")
    elif os.getenv("WORKFLOW_CANON_INDENT"):
        indent = _parse_indent(os.environ["WORKFLOW_CANON_INDENT"], "WORKFLOW_CANON_INDENT")
    if indent is not None:
        settings.indent = indent

    return settings


def _parse_suffix(value: str, source: str) -> str:
    # An empty suffix would make the output path equal to the input path
    if not value:
        raise ConfigError(f"{source}: output suffix must not be empty")
    return value


def _parse_indent(value: Any, source: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{source}: indent must be an integer, got {value!r}")
    try:
        indent = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{source}: indent must be an integer, got {value!r}")
    if indent < 0:
        raise ConfigError(f"{source}: indent must not be negative")
    return indent


def _parse_key_list(value: Any, where: str) -> frozenset[str]:
    if not isinstance(value, list):
        raise ConfigError(f"{where} must be a list")
    if not all(isinstance(v, str) for v in value):
        raise ConfigError(f"All entries of {where} must be strings")
    return frozenset(value)


def _parse_profiles(data: Any, path: Path) -> dict[str, CleanupProfile]:
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: 'profiles' must be a dictionary")

    profiles = dict(DEFAULT_PROFILES)
    for kind, rules in data.items():
        if kind not in ENTITY_KINDS:
            raise ConfigError(
                f"{path}: unknown profile '{kind}'. Available profiles: {list(ENTITY_KINDS)}"
            )
        if not isinstance(rules, dict):
            raise ConfigError(f"{path}: profile '{kind}' must be a dictionary")

        unknown = set(rules) - set(_PROFILE_RULES)
        if unknown:
            raise ConfigError(
                f"{path}: profile '{kind}' has unknown rule(s): {sorted(unknown)}"
            )

        parsed = {
            rule: _parse_key_list(rules[rule], f"profiles.{kind}.{rule}")
            for rule in _PROFILE_RULES
            if rule in rules
        }
        profiles[kind] = profiles[kind].extend(**parsed)

    return profiles


def _parse_config_file(path: Path) -> Settings:
    """Parse a .workflow-canon.yaml file.

    Args:
        path: Path to config file

    Returns:
        Settings read from the file

    Raises:
        ConfigError: If the file cannot be read or is invalid
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Failed to read config at {path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse config YAML: {e}")

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config root must be a dictionary")

    settings = Settings()

    if "output_suffix" in data:
        if not isinstance(data["output_suffix"], str):
            raise ConfigError(f"{path}: 'output_suffix' must be a string")
        settings.output_suffix = _parse_suffix(data["output_suffix"], str(path))

    if "indent" in data:
        settings.indent = _parse_indent(data["indent"], str(path))

    if "profiles" in data:
        settings.profiles = _parse_profiles(data["profiles"], path)

    return settings
