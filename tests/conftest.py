"""Shared fixtures for the colortool test suite.

Settings and the named-color table are cached per process; every test
starts and ends with empty caches and without ``$COLORTOOL_CONFIG`` so a
test that swaps settings cannot leak into the next one.
"""

from pathlib import Path

import pytest
import yaml

from colortool import named_colors
from colortool.configs import loader
from colortool.utils import fs


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Clear cached settings/table and the settings override variable."""
    monkeypatch.delenv(loader.ENV_VAR, raising=False)
    loader.get_settings.cache_clear()
    named_colors.clear_cache()
    yield
    loader.get_settings.cache_clear()
    named_colors.clear_cache()


@pytest.fixture
def write_settings(tmp_path):
    """Factory writing a colortool.v1 settings file with section overrides."""
    def _write(name: str = "colortool.yaml", **sections) -> Path:
        data = {
            "schema_version": "colortool.v1",
            "named_colors": {"table": str(fs.package_path("data/named_colors.yaml"))},
        }
        data.update(sections)
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def use_settings(monkeypatch, write_settings):
    """Point get_settings() at a custom file for the duration of a test."""
    def _use(**sections) -> Path:
        path = write_settings(**sections)
        monkeypatch.setenv(loader.ENV_VAR, str(path))
        loader.reload_settings()
        return path

    return _use
