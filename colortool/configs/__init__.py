"""Settings for colortool (YAML files validated with pydantic)."""

from .loader import ConfigError, SettingsV1, get_settings, load_settings, reload_settings

__all__ = [
    'ConfigError',
    'SettingsV1',
    'get_settings',
    'load_settings',
    'reload_settings',
]
