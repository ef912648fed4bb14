"""Free-form color string parsing.

parse() normalizes the textual forms a user might paste into a color field
to a lowercase hex string:

    - ``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``
    - ``rgb(r, g, b)`` / ``rgba(r, g, b, a)``
    - ``hsl(h, s%, l%)`` / ``hsla(h, s%, l%, a)``
    - CSS color names (case-insensitive)

Anything else yields ``None``, which callers must check before using the
result. Numeric components are clamped into range (hue wraps modulo 360)
rather than rejected.
"""

import logging
import re
from typing import Optional

from .hex_codec import encode, encode_components, is_valid_hex
from .models import clamp
from .named_colors import lookup
from .rgb_converter import hsl_values_to_rgb

logger = logging.getLogger(__name__)

_RGB_RE = re.compile(r"rgba?\((\d+),\s*(\d+),\s*(\d+)(?:,\s*([0-9.]+))?\)", re.IGNORECASE)
_HSL_RE = re.compile(r"hsla?\((\d+),\s*(\d+)%,\s*(\d+)%(?:,\s*([0-9.]+))?\)", re.IGNORECASE)


def _alpha(group: Optional[str]) -> float:
    if not group:
        return 1.0
    try:
        return clamp(float(group), 0.0, 1.0)
    except ValueError:
        # e.g. "0.5.1" matches the character class
        return 1.0


def _parse_rgb(text: str) -> Optional[str]:
    match = _RGB_RE.search(text)
    if not match:
        return None
    r, g, b = (int(v) for v in match.group(1, 2, 3))
    return encode_components(r, g, b, _alpha(match.group(4)))


def _parse_hsl(text: str) -> Optional[str]:
    match = _HSL_RE.search(text)
    if not match:
        return None
    h, s, l = (int(v) for v in match.group(1, 2, 3))
    rgb = hsl_values_to_rgb(h % 360, clamp(s, 0, 100), clamp(l, 0, 100), _alpha(match.group(4)))
    return encode(rgb)


def parse(text: str) -> Optional[str]:
    """Parse a color string to lowercase hex.

    Parameters
    ----------
    text : str
        Color in hex, rgb(a), hsl(a) or named form; surrounding whitespace
        is ignored

    Returns
    -------
    str or None
        Hex string, or None when the text is not a recognized color

    Examples
    --------
    >>> parse("rgb(255, 0, 0)")
    '#ff0000'
    >>> parse("not a color") is None
    True
    """
    text = text.strip()
    lowered = text.lower()
    result = None

    if text.startswith('#'):
        result = text.lower() if is_valid_hex(text) else None
    elif lowered.startswith('rgb'):
        result = _parse_rgb(text)
    elif lowered.startswith('hsl'):
        result = _parse_hsl(text)

    if result is None and not text.startswith('#'):
        result = lookup(text)

    if result is None:
        logger.debug("Unrecognized color string: %r", text)
    return result
