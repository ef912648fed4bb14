"""Test settings loading and validation.

Tests for colortool.configs.loader:
    - Bundled defaults load and match documented values
    - $COLORTOOL_CONFIG override and caching
    - Schema version, unknown keys, range and level checks → ConfigError
    - Missing file → FileNotFoundError
    - Unusable $COLORTOOL_CONFIG → logged, bundled settings used
    - WCAG thresholds are not a settings section
    - Named-color table path resolved relative to the settings file

Run:
    pytest tests/test_config.py -v
"""

import logging

import pytest
from pydantic import ValidationError

from colortool.configs import loader
from colortool.configs.loader import ConfigError, SettingsV1
from colortool.contrast import is_wcag_aa_compliant
from colortool.harmony import analogous, shades
from colortool.parser import parse


# ============================================================================
# DEFAULTS
# ============================================================================

def test_bundled_defaults():
    settings = loader.get_settings()
    assert settings.schema_version == "colortool.v1"
    assert settings.harmony.analogous_count == 3
    assert settings.harmony.analogous_angle == 30.0
    assert settings.harmony.shade_count == 5
    assert settings.harmony.tint_count == 5
    assert settings.logging.log_level == "INFO"


def test_bundled_table_path_exists():
    path = loader.get_settings().named_color_table_path
    assert path.is_file()
    assert path.name == "named_colors.yaml"


def test_get_settings_is_cached():
    assert loader.get_settings() is loader.get_settings()


def test_model_defaults_without_sections():
    """Only schema_version is required; every section has defaults."""
    settings = SettingsV1(schema_version="colortool.v1")
    assert settings.harmony.analogous_count == 3
    assert settings.named_colors.table == "../data/named_colors.yaml"


def test_settings_are_frozen():
    settings = loader.get_settings()
    with pytest.raises(ValidationError):
        settings.harmony.analogous_count = 7


# ============================================================================
# OVERRIDES
# ============================================================================

def test_env_var_override(monkeypatch, write_settings):
    path = write_settings(harmony={"analogous_count": 6})
    monkeypatch.setenv(loader.ENV_VAR, str(path))
    loader.get_settings.cache_clear()

    settings = loader.get_settings()
    assert settings.harmony.analogous_count == 6
    assert settings.source_path == path.resolve()


def test_reload_settings_picks_up_changes(monkeypatch, write_settings):
    monkeypatch.setenv(loader.ENV_VAR, str(write_settings(harmony={"shade_count": 2})))
    assert loader.reload_settings().harmony.shade_count == 2

    monkeypatch.setenv(loader.ENV_VAR, str(write_settings("other.yaml", harmony={"shade_count": 9})))
    assert loader.get_settings().harmony.shade_count == 2
    assert loader.reload_settings().harmony.shade_count == 9


def test_relative_table_path_resolves_against_file(tmp_path, write_settings):
    path = write_settings(named_colors={"table": "tables/colors.yaml"})
    settings = loader.load_settings(path)
    assert settings.named_color_table_path == (tmp_path / "tables" / "colors.yaml").resolve()


def test_log_level_normalized(write_settings):
    settings = loader.load_settings(write_settings(logging={"log_level": "debug"}))
    assert settings.logging.log_level == "DEBUG"


def test_logging_kwargs(write_settings):
    path = write_settings(logging={"log_level": "WARNING", "json_format": True, "color": False})
    kwargs = loader.load_settings(path).logging.as_kwargs()
    assert kwargs == {"log_level": "WARNING", "log_file": None, "json": True, "color": False}


# ============================================================================
# VALIDATION ERRORS
# ============================================================================

@pytest.mark.parametrize("sections", [
    {"schema_version": "colortool.v2"},
    {"harmony": {"analogous_count": 0}},
    {"harmony": {"analogous_angle": 360}},
    {"harmony": {"palette_size": 4}},
    {"contrast": {"aa_normal": 21.0}},
    {"logging": {"log_level": "LOUD"}},
    {"unknown_section": {}},
])
def test_invalid_settings_raise_config_error(write_settings, sections):
    with pytest.raises(ConfigError, match="validation failed"):
        loader.load_settings(write_settings(**sections))


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader.load_settings(tmp_path / "nope.yaml")


def test_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="mapping"):
        loader.load_settings(path)


def test_malformed_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("harmony: {analogous_count: [\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="could not be parsed"):
        loader.load_settings(path)


# ============================================================================
# BROKEN OVERRIDE FALLS BACK TO BUNDLED SETTINGS
# ============================================================================

@pytest.fixture(params=["missing", "bad_schema", "bad_yaml"])
def broken_override(request, monkeypatch, tmp_path, write_settings):
    """Point $COLORTOOL_CONFIG at an unusable settings file."""
    if request.param == "missing":
        path = tmp_path / "missing.yaml"
    elif request.param == "bad_schema":
        path = write_settings(schema_version="other")
    else:
        path = tmp_path / "broken.yaml"
        path.write_text("harmony: [\n", encoding="utf-8")
    monkeypatch.setenv(loader.ENV_VAR, str(path))
    return path


def test_broken_override_uses_bundled_settings(broken_override, caplog):
    with caplog.at_level(logging.ERROR, logger="colortool.configs.loader"):
        settings = loader.get_settings()

    assert settings.source_path == loader.DEFAULT_SETTINGS_PATH.resolve()
    assert "using bundled settings" in caplog.text


def test_broken_override_keeps_parse_working(broken_override):
    assert parse("red") == "#ff0000"


def test_broken_override_keeps_contrast_working(broken_override):
    assert is_wcag_aa_compliant("#000000", "#ffffff")


def test_broken_override_keeps_harmony_working(broken_override):
    assert len(analogous("#ff0000")) == 3
    assert len(shades("#ff0000")) == 5


def test_load_settings_still_raises_on_bad_file(broken_override):
    """Only get_settings() falls back; explicit loads report the problem."""
    with pytest.raises((FileNotFoundError, ConfigError)):
        loader.load_settings(broken_override)
