"""YAML configuration loading.

Profiles live in the project's config/ directory as <profile>.yaml. A file
may name a base file with 'extends'; the two are merged key by key.
"""

import os
from pathlib import Path
from typing import Any

import yaml

from . import (
    AnalysisConfig,
    LoggingConfig,
    MoodTrackerConfig,
    ReportConfig,
    StorageConfig,
)

CONFIG_DIR = Path(__file__).parent.parent.parent.parent / "config"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base, recursing into nested dicts."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def load_yaml_with_inheritance(path: Path) -> dict[str, Any]:
    """Read a YAML file, resolving its 'extends' chain.

    Raises:
        FileNotFoundError: If the file or one of its bases is missing.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    raw = yaml.safe_load(path.read_text()) or {}

    base_name = raw.pop("extends", None)
    if base_name is None:
        return raw
    return deep_merge(load_yaml_with_inheritance(path.parent / base_name), raw)


def dict_to_config(data: dict[str, Any]) -> MoodTrackerConfig:
    """Build the typed config from the 'moodtracker' section.

    Unknown keys raise TypeError from the section dataclass.
    """
    root = data.get("moodtracker") or {}

    def section(key: str) -> dict[str, Any]:
        # An empty YAML section parses as None
        return root.get(key) or {}

    return MoodTrackerConfig(
        storage=StorageConfig(**section("storage")),
        logging=LoggingConfig(**section("logging")),
        analysis=AnalysisConfig(**section("analysis")),
        report=ReportConfig(**section("report")),
    )


def apply_env_overrides(config: MoodTrackerConfig) -> MoodTrackerConfig:
    """Apply environment variable overrides."""
    uri = os.environ.get("MONGODB_URI")
    if uri:
        config.storage.uri = uri
    return config


def load_config(
    path: str | Path | None = None,
    profile: str | None = None,
    config_dir: Path = CONFIG_DIR,
) -> MoodTrackerConfig:
    """Load MoodTracker configuration.

    Args:
        path: Direct path to config file (takes precedence)
        profile: Profile name ('dev', 'prod', 'test'), defaults to 'dev'
        config_dir: Directory holding the profile files

    Returns:
        Parsed MoodTrackerConfig

    Examples:
        >>> config = load_config(profile="test")
        >>> config = load_config(path="/path/to/config.yaml")
    """
    if path is None:
        path = config_dir / f"{profile or 'dev'}.yaml"

    raw_config = load_yaml_with_inheritance(Path(path))
    return apply_env_overrides(dict_to_config(raw_config))


__all__ = [
    "CONFIG_DIR",
    "apply_env_overrides",
    "deep_merge",
    "dict_to_config",
    "load_config",
    "load_yaml_with_inheritance",
]
