"""Hex string ↔ RGB codec.

Accepted forms (``#`` optional on decode, case-insensitive):
    - ``rgb`` / ``rgba``: short forms, each digit doubled
    - ``rrggbb`` / ``rrggbbaa``: full forms

Alpha is carried as the last byte divided by 255, kept to 2 decimals.

Two decoders are provided:
    - decode_strict(): raises InvalidHexError on malformed input
    - decode(): legacy behavior, degrades malformed input to opaque black

Encoding always emits lowercase, 6 digits for opaque colors and 8 digits
otherwise.
"""

import logging
import re

from .models import HEX_PATTERN, RGB, clamp, round_half_up

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(HEX_PATTERN)
_DIGITS_RE = re.compile(r"[0-9a-fA-F]*")

BLACK = RGB(r=0, g=0, b=0, a=1.0)


class InvalidHexError(ValueError):
    """Raised when a string is not a 3, 4, 6 or 8 digit hex color."""

    pass


def is_valid_hex(text: str) -> bool:
    """True for ``#`` followed by 3, 4, 6 or 8 hex digits."""
    return bool(_HEX_RE.fullmatch(text))


def decode_strict(hex_str: str) -> RGB:
    """Decode a hex color, rejecting anything malformed.

    Parameters
    ----------
    hex_str : str
        ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa`` (``#`` optional)

    Returns
    -------
    RGB
        Decoded color; alpha is 1.0 for the 3 and 6 digit forms

    Raises
    ------
    InvalidHexError
        If the digit count is not 3, 4, 6 or 8, or a character is not hex
    """
    digits = hex_str[1:] if hex_str.startswith('#') else hex_str

    if not _DIGITS_RE.fullmatch(digits):
        raise InvalidHexError(f"Hex color contains non-hex characters: {hex_str!r}")

    if len(digits) in (3, 4):
        digits = ''.join(ch * 2 for ch in digits)
    elif len(digits) not in (6, 8):
        raise InvalidHexError(
            f"Hex color must have 3, 4, 6 or 8 digits, got {len(digits)}: {hex_str!r}"
        )

    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = 1.0
    if len(digits) == 8:
        a = round(int(digits[6:8], 16) / 255, 2)

    return RGB(r=r, g=g, b=b, a=a)


def decode(hex_str: str) -> RGB:
    """Decode a hex color, returning opaque black for malformed input.

    Black is also a legitimate decode result, so callers that need to tell
    the two apart must use decode_strict().
    """
    try:
        return decode_strict(hex_str)
    except InvalidHexError as e:
        logger.warning("Malformed hex color, using black: %s", e)
        return BLACK


def encode_components(r: float, g: float, b: float, a: float = 1.0) -> str:
    """Encode raw channel values, clamping them into range first.

    Parameters
    ----------
    r, g, b : float
        Channels, rounded then clamped to [0, 255]
    a : float
        Alpha, clamped to [0, 1], default 1.0

    Returns
    -------
    str
        ``#rrggbb`` when opaque, ``#rrggbbaa`` otherwise (lowercase)
    """
    channels = [int(clamp(round_half_up(v), 0, 255)) for v in (r, g, b)]
    a = clamp(a, 0.0, 1.0)

    out = '#' + ''.join(f"{v:02x}" for v in channels)
    if a < 1:
        out += f"{round_half_up(a * 255):02x}"
    return out


def encode(rgb: RGB) -> str:
    """Encode an RGB value as a lowercase hex string."""
    return encode_components(rgb.r, rgb.g, rgb.b, rgb.a)
