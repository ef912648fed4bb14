"""Settings loader for colortool.

Loads ``colortool.v1.yaml`` into a validated, frozen pydantic model. The
settings hold the defaults the UI relies on (harmony counts and angles,
the named-color table location, logging options), so callers can tune
them without touching code. WCAG thresholds are fixed by the standard and
live in contrast.py.

Resolution order for get_settings():
    1. ``$COLORTOOL_CONFIG`` if set
    2. the bundled ``colortool/configs/colortool.v1.yaml``

A broken override (missing file, bad YAML, failed validation) is logged
and the bundled defaults are used instead, so color operations keep
working with a misconfigured environment. Call load_settings() directly
to surface the error.

Usage::

    from colortool.configs.loader import get_settings, load_settings
    settings = get_settings()                        # cached default
    settings = load_settings("/custom/colortool.yaml")
"""

from __future__ import annotations

import functools
import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..utils import fs

logger = logging.getLogger(__name__)

ENV_VAR = "COLORTOOL_CONFIG"
DEFAULT_SETTINGS_PATH = fs.package_path("configs/colortool.v1.yaml")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(ValueError):
    """Raised when a settings file or the named-color table is invalid."""

    pass


# ---------------------------------------------------------------------------
# Schema -- mirrors the YAML structure
# ---------------------------------------------------------------------------


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, extra='forbid')


class HarmonySettings(_Section):
    """Default sizes for the generated palettes."""
    analogous_count: int = Field(3, ge=1, description="Colors in an analogous scheme")
    analogous_angle: float = Field(30.0, gt=0.0, lt=360.0, description="Degrees between neighbours")
    shade_count: int = Field(5, ge=1)
    tint_count: int = Field(5, ge=1)


class NamedColorSettings(_Section):
    """Location of the named-color table (relative to the settings file)."""
    table: str = "../data/named_colors.yaml"


class LoggingSettings(_Section):
    """Options for utils.logging_config.setup_logging().

    ``json_format`` avoids shadowing ``BaseModel.json``, so pass the
    section through as_kwargs() rather than model_dump().
    """
    log_level: str = "INFO"
    log_file: Optional[str] = None
    json_format: bool = False
    color: bool = True

    @field_validator('log_level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got '{v}'")
        return v.upper()

    def as_kwargs(self) -> dict:
        """Arguments for setup_logging(), e.g. ``setup_logging(**s.as_kwargs())``."""
        return {
            "log_level": self.log_level,
            "log_file": self.log_file,
            "json": self.json_format,
            "color": self.color,
        }


class SettingsV1(_Section):
    """Complete colortool settings."""
    schema_version: str = Field(..., description="Must be 'colortool.v1'")
    harmony: HarmonySettings = HarmonySettings()
    named_colors: NamedColorSettings = NamedColorSettings()
    logging: LoggingSettings = LoggingSettings()
    source_path: Optional[Path] = Field(None, exclude=True)

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "colortool.v1":
            raise ValueError(f"Expected schema 'colortool.v1', got '{v}'")
        return v

    @property
    def named_color_table_path(self) -> Path:
        """Named-color table path, resolved against the settings file."""
        table = Path(self.named_colors.table)
        if table.is_absolute() or self.source_path is None:
            return table
        return (self.source_path.parent / table).resolve()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_settings(path: Union[str, Path]) -> SettingsV1:
    """Load and validate a settings file.

    Parameters
    ----------
    path : Union[str, Path]
        Path to a colortool.v1 YAML file

    Returns
    -------
    SettingsV1
        Validated settings

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ConfigError
        If the YAML is malformed or fails validation
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    try:
        data = fs.load_yaml(path)
    except Exception as e:
        raise ConfigError(f"Settings file could not be parsed at {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file must contain a mapping at top level: {path}")

    try:
        settings = SettingsV1(**{**data, "source_path": path.resolve()})
    except ValidationError as e:
        raise ConfigError(f"Settings validation failed at {path}: {e}") from e

    logger.debug("Loaded settings from %s", path)
    return settings


@functools.lru_cache(maxsize=1)
def get_settings() -> SettingsV1:
    """Return the process-wide settings, loading them on first use.

    An unusable ``$COLORTOOL_CONFIG`` file is logged at ERROR level and the
    bundled defaults are returned in its place.
    """
    override = os.environ.get(ENV_VAR)
    if override:
        try:
            return load_settings(override)
        except (FileNotFoundError, ConfigError) as e:
            logger.error("Ignoring %s=%s, using bundled settings: %s", ENV_VAR, override, e)
    return load_settings(DEFAULT_SETTINGS_PATH)


def reload_settings() -> SettingsV1:
    """Drop cached settings and named-color table, then load again."""
    from .. import named_colors

    get_settings.cache_clear()
    named_colors.clear_cache()
    return get_settings()
