"""WCAG contrast and readability helpers.

Relative luminance (WCAG 2.x):
    - Channels scaled to [0, 1] and linearized:
      c / 12.92 for c <= 0.03928, ((c + 0.055) / 1.055) ** 2.4 above
    - L = 0.2126·R + 0.7152·G + 0.0722·B

Contrast ratio = (L_light + 0.05) / (L_dark + 0.05), in [1, 21], rounded to
2 decimals; argument order does not matter.

Compliance thresholds are the fixed WCAG 2.x minimums: AA 4.5 (3.0 for
large text) and AAA 7.0 (4.5 for large text).

brightness(), is_light() and readable_text_color() use the simpler
perceived-brightness formula (299·R + 587·G + 114·B) / 1000 to pick black or
white text for a background.
"""

from typing import Union

from .hex_codec import decode
from .models import RGB

ColorLike = Union[str, RGB]

# Linear-segment threshold from WCAG 2.x (sRGB itself uses 0.04045)
LINEAR_THRESHOLD = 0.03928
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)

# WCAG 2.x minimum contrast ratios
AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5


def _as_rgb(color: ColorLike) -> RGB:
    return color if isinstance(color, RGB) else decode(color)


def _linearize(channel: float) -> float:
    if channel <= LINEAR_THRESHOLD:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    """WCAG relative luminance in [0, 1] of a hex string or RGB value."""
    rgb = _as_rgb(color)
    channels = (_linearize(v / 255) for v in (rgb.r, rgb.g, rgb.b))
    return sum(w * c for w, c in zip(LUMINANCE_WEIGHTS, channels))


def contrast_ratio(color1: ColorLike, color2: ColorLike) -> float:
    """Contrast ratio between two colors, rounded to 2 decimals.

    Examples
    --------
    >>> contrast_ratio("#ffffff", "#000000")
    21.0
    """
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)
    lighter, darker = max(l1, l2), min(l1, l2)
    return round((lighter + 0.05) / (darker + 0.05), 2)


def is_wcag_aa_compliant(foreground: ColorLike, background: ColorLike, large_text: bool = False) -> bool:
    """True if the pair meets WCAG AA (4.5:1, or 3:1 for large text)."""
    minimum = AA_LARGE if large_text else AA_NORMAL
    return contrast_ratio(foreground, background) >= minimum


def is_wcag_aaa_compliant(foreground: ColorLike, background: ColorLike, large_text: bool = False) -> bool:
    """True if the pair meets WCAG AAA (7:1, or 4.5:1 for large text)."""
    minimum = AAA_LARGE if large_text else AAA_NORMAL
    return contrast_ratio(foreground, background) >= minimum


def brightness(color: ColorLike) -> float:
    """Perceived brightness in [0, 255]."""
    rgb = _as_rgb(color)
    return (rgb.r * 299 + rgb.g * 587 + rgb.b * 114) / 1000


def is_light(color: ColorLike) -> bool:
    return brightness(color) > 128


def readable_text_color(background: ColorLike) -> str:
    """``#000000`` on light backgrounds, ``#ffffff`` on dark ones."""
    return '#000000' if is_light(background) else '#ffffff'
