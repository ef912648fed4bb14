"""Direct space-to-space entry points composed from the codec and converters.

No independent math lives here: every function is a composition through
RGB, e.g. ``hsv_to_hsl = rgb_to_hsl ∘ hsv_to_rgb``. Alpha survives every
route except those through CMYK, which has none.

Hex inputs are decoded leniently (malformed strings become black); use
hex_codec.decode_strict() first when that matters.
"""

from .hex_codec import decode, encode
from .models import CMYK, HSL, HSV
from .rgb_converter import (
    cmyk_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    rgb_to_cmyk,
    rgb_to_hsl,
    rgb_to_hsv,
)

hex_to_rgb = decode
rgb_to_hex = encode


def hsv_to_hsl(hsv: HSV) -> HSL:
    return rgb_to_hsl(hsv_to_rgb(hsv))


def hsl_to_hsv(hsl: HSL) -> HSV:
    return rgb_to_hsv(hsl_to_rgb(hsl))


def hex_to_hsl(hex_str: str) -> HSL:
    return rgb_to_hsl(decode(hex_str))


def hsl_to_hex(hsl: HSL) -> str:
    return encode(hsl_to_rgb(hsl))


def hex_to_hsv(hex_str: str) -> HSV:
    return rgb_to_hsv(decode(hex_str))


def hsv_to_hex(hsv: HSV) -> str:
    return encode(hsv_to_rgb(hsv))


def hex_to_cmyk(hex_str: str) -> CMYK:
    return rgb_to_cmyk(decode(hex_str))


def cmyk_to_hex(cmyk: CMYK) -> str:
    return encode(cmyk_to_rgb(cmyk))


__all__ = [
    'hex_to_rgb',
    'rgb_to_hex',
    'hsv_to_hsl',
    'hsl_to_hsv',
    'hex_to_hsl',
    'hsl_to_hex',
    'hex_to_hsv',
    'hsv_to_hex',
    'hex_to_cmyk',
    'cmyk_to_hex',
]
