"""Named-color table and nearest-match lookup.

The table maps lowercase CSS color names to 6-digit hex values. It is read
once from YAML (location from settings) and shared read-only afterwards.

Nearest match uses a weighted Euclidean distance in RGB:

    d = sqrt(3·Δr² + 4·Δg² + 2·Δb²)

computed for the whole table at once with numpy. Ties resolve to the entry
that comes first in the table (numpy.argmin returns the first minimum), so
``#00ffff`` matches ``aqua`` rather than ``cyan``.
"""

import functools
import logging
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple, Union

import numpy as np
from pydantic import ValidationError

from .configs.loader import ConfigError, get_settings
from .hex_codec import decode
from .models import ClosestColor, NamedColor
from .utils import fs

logger = logging.getLogger(__name__)

CHANNEL_WEIGHTS = np.array([3.0, 4.0, 2.0])
BUNDLED_TABLE_PATH = fs.package_path("data/named_colors.yaml")


def load_named_colors(path: Optional[Union[str, Path]] = None) -> Tuple[NamedColor, ...]:
    """Load and validate a named-color table.

    Parameters
    ----------
    path : Union[str, Path], optional
        YAML mapping of name → hex; defaults to the table named in settings

    Returns
    -------
    tuple of NamedColor
        Entries in file order

    Raises
    ------
    FileNotFoundError
        If the table doesn't exist
    ConfigError
        If an entry has an invalid name or hex value, or a name repeats
        (case-insensitively)
    """
    if path is None:
        path = get_settings().named_color_table_path
    path = Path(path)

    try:
        data = fs.load_yaml(path)
    except FileNotFoundError:
        raise
    except Exception as e:
        raise ConfigError(f"Named-color table could not be parsed at {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Named-color table must be a mapping: {path}")

    entries = []
    seen = set()
    for name, hex_value in data.items():
        key = str(name).lower()
        if key in seen:
            raise ConfigError(f"Duplicate color name '{name}' in {path}")
        seen.add(key)
        try:
            entries.append(NamedColor(name=str(name), hex=str(hex_value)))
        except ValidationError as e:
            raise ConfigError(f"Invalid named color '{name}' in {path}: {e}") from e

    logger.info("Loaded %d named colors from %s", len(entries), path)
    return tuple(entries)


@functools.lru_cache(maxsize=1)
def default_table() -> Tuple[NamedColor, ...]:
    """The process-wide table, loaded on first use.

    Falls back to the bundled table (with an ERROR log) when the table
    named in settings is missing or invalid.
    """
    path = get_settings().named_color_table_path
    try:
        return load_named_colors(path)
    except (FileNotFoundError, ConfigError) as e:
        logger.error("Named-color table %s unusable, using bundled table: %s", path, e)
    return load_named_colors(BUNDLED_TABLE_PATH)


def _rgb_matrix(table: Sequence[NamedColor]) -> np.ndarray:
    return np.array(
        [[c.r, c.g, c.b] for c in (decode(entry.hex) for entry in table)],
        dtype=np.float64
    )


@functools.lru_cache(maxsize=1)
def _default_matrix() -> np.ndarray:
    return _rgb_matrix(default_table())


@functools.lru_cache(maxsize=1)
def _default_index() -> Dict[str, str]:
    return {entry.name: entry.hex for entry in default_table()}


def clear_cache() -> None:
    """Forget the cached table (used when settings are reloaded)."""
    default_table.cache_clear()
    _default_index.cache_clear()
    _default_matrix.cache_clear()


def lookup(name: str) -> Optional[str]:
    """Hex value for a color name (case-insensitive), or None if unknown."""
    return _default_index().get(name.strip().lower())


def closest(
    hex_str: str,
    table: Optional[Sequence[NamedColor]] = None
) -> Optional[ClosestColor]:
    """Find the named color nearest to ``hex_str``.

    Parameters
    ----------
    hex_str : str
        Query color (decoded leniently; alpha is ignored)
    table : sequence of NamedColor, optional
        Table to search; defaults to the shared named-color table

    Returns
    -------
    ClosestColor or None
        Best match with its distance, or None when the table is empty
    """
    shared = table is None
    if shared:
        table = default_table()
    if len(table) == 0:
        return None
    candidates = _default_matrix() if shared else _rgb_matrix(table)

    target = decode(hex_str)
    query = np.array([target.r, target.g, target.b], dtype=np.float64)
    distances = np.sqrt(((candidates - query) ** 2 * CHANNEL_WEIGHTS).sum(axis=1))
    best = int(np.argmin(distances))

    entry = table[best]
    return ClosestColor(name=entry.name, hex=entry.hex, distance=float(distances[best]))
