"""Read-only access to the YAML files bundled with the library.

Provides:
    - load_yaml(): parse a settings or data file with yaml.safe_load
    - package_path(): resolve a path relative to the installed package

The library never writes files. The only reads happen once, the first
time settings or the named-color table are requested.

Usage:
    from colortool.utils import fs
    data = fs.load_yaml(fs.package_path("data/named_colors.yaml"))
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml

_PACKAGE_ROOT = Path(__file__).resolve().parent.parent


def package_path(relative: Union[str, Path]) -> Path:
    """Resolve ``relative`` against the ``colortool`` package directory.

    Parameters
    ----------
    relative : Union[str, Path]
        Path inside the package, e.g. ``"configs/colortool.v1.yaml"``

    Returns
    -------
    Path
        Absolute path (existence is not checked)
    """
    return _PACKAGE_ROOT / relative


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """Load YAML file safely.

    Parameters
    ----------
    path : Union[str, Path]
        YAML file path

    Returns
    -------
    Dict[str, Any]
        Parsed YAML content (empty dict for an empty file)

    Raises
    ------
    FileNotFoundError
        If file doesn't exist
    yaml.YAMLError
        If YAML parsing fails

    Notes
    -----
    Uses safe_load to prevent arbitrary code execution. Mapping order
    is preserved, which the named-color tie-break relies on.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e

    return data if data is not None else {}
