"""Configuration settings for Beblia.

Settings are read from an optional YAML file:
- explicit path passed to load_settings()
- BEBLIA_CONFIG_PATH env override
- ~/.beblia/config.yaml (silently skipped when absent)

Example config.yaml:
    localization_path: ~/bibles/french-books.txt
    log_level: INFO
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from beblia.errors import ConfigError, NotFoundError

CONFIG_ENV_VAR = "BEBLIA_CONFIG_PATH"


def default_config_path() -> Path:
    return Path.home() / ".beblia" / "config.yaml"


@dataclass
class Settings:
    """Application settings."""

    # Custom book table installed as the process-wide default (None = built-in)
    localization_path: Path | None = None

    # File conventions
    binary_extension: str = ".beblia"

    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create Settings from a parsed config mapping."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(unknown)}")

        values = dict(data)
        if values.get("localization_path"):
            values["localization_path"] = Path(
                values["localization_path"]
            ).expanduser()
        else:
            values.pop("localization_path", None)

        for key in ("binary_extension", "log_level"):
            if key in values and not isinstance(values[key], str):
                raise ConfigError(f"Setting '{key}' must be a string")

        if "log_level" in values:
            values["log_level"] = values["log_level"].upper()

        return cls(**values)


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from YAML.

    Args:
        path: Explicit settings file; falls back to the environment override,
            then to the per-user default file

    Raises:
        NotFoundError: If an explicit or env-specified file does not exist
        ConfigError: If the file is not a valid settings mapping
    """
    explicit = path or os.environ.get(CONFIG_ENV_VAR)
    config_path = Path(explicit).expanduser() if explicit else default_config_path()

    if not config_path.is_file():
        if explicit:
            raise NotFoundError(config_path, what="Settings file")
        return Settings()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {config_path} must contain a mapping")

    return Settings.from_dict(data)
