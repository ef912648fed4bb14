"""RGB ↔ HSL / HSV / CMYK conversions.

Standard colorimetric formulas on channels normalized to [0, 1]:
    - Hue from the max channel: (g-b)/d, (b-r)/d + 2, (r-g)/d + 4, × 60°
    - Achromatic colors (max == min) get hue 0 and saturation 0
    - HSL → RGB through the piecewise hue-to-channel helper
    - HSV → RGB through the six-sector (i, f, p, q, t) construction
    - CMYK: k = 1 - max(r, g, b); pure black short-circuits to k = 100

Integer components are rounded half-up; alpha passes through unchanged.
A hue that rounds to 360 wraps to 0.
"""

import math
from typing import Tuple

from .models import CMYK, HSL, HSV, RGB, round_half_up


def _hue_degrees(r: float, g: float, b: float, mx: float, d: float) -> int:
    if mx == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return round_half_up(h * 60) % 360


def _normalized(rgb: RGB) -> Tuple[float, float, float]:
    return rgb.r / 255, rgb.g / 255, rgb.b / 255


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert RGB to HSL.

    Saturation uses ``d / (2 - max - min)`` above 50% lightness and
    ``d / (max + min)`` below, so neither denominator reaches zero for a
    chromatic color.
    """
    r, g, b = _normalized(rgb)
    mx, mn = max(r, g, b), min(r, g, b)
    l = (mx + mn) / 2
    h = 0
    s = 0.0

    if mx != mn:
        d = mx - mn
        s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
        h = _hue_degrees(r, g, b, mx, d)

    return HSL(h=h, s=round_half_up(s * 100), l=round_half_up(l * 100), a=rgb.a)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_values_to_rgb(h: float, s: float, l: float, a: float = 1.0) -> RGB:
    """HSL → RGB on raw numbers.

    Accepts fractional components (interpolated lightness, arbitrary
    rotation angles). ``h`` is taken modulo 360; ``s`` and ``l`` are
    percentages and must already lie in [0, 100].
    """
    h = (h % 360) / 360
    s /= 100
    l /= 100

    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(
        r=round_half_up(r * 255),
        g=round_half_up(g * 255),
        b=round_half_up(b * 255),
        a=a
    )


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert HSL to RGB."""
    return hsl_values_to_rgb(hsl.h, hsl.s, hsl.l, hsl.a)


def rgb_to_hsv(rgb: RGB) -> HSV:
    """Convert RGB to HSV. Black (max == 0) has saturation 0."""
    r, g, b = _normalized(rgb)
    mx, mn = max(r, g, b), min(r, g, b)
    d = mx - mn
    s = 0.0 if mx == 0 else d / mx
    h = _hue_degrees(r, g, b, mx, d) if mx != mn else 0

    return HSV(h=h, s=round_half_up(s * 100), v=round_half_up(mx * 100), a=rgb.a)


def hsv_to_rgb(hsv: HSV) -> RGB:
    """Convert HSV to RGB using the six-sector construction."""
    h = hsv.h / 360
    s = hsv.s / 100
    v = hsv.v / 100

    i = math.floor(h * 6)
    f = h * 6 - i
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    r, g, b = [
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    ][i % 6]

    return RGB(
        r=round_half_up(r * 255),
        g=round_half_up(g * 255),
        b=round_half_up(b * 255),
        a=hsv.a
    )


def rgb_to_cmyk(rgb: RGB) -> CMYK:
    """Convert RGB to CMYK; alpha is dropped.

    Pure black returns ``CMYK(0, 0, 0, 100)`` instead of dividing by
    ``1 - k == 0``.
    """
    r, g, b = _normalized(rgb)
    k = 1 - max(r, g, b)

    if k == 1:
        return CMYK(c=0, m=0, y=0, k=100)

    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)

    return CMYK(
        c=round_half_up(c * 100),
        m=round_half_up(m * 100),
        y=round_half_up(y * 100),
        k=round_half_up(k * 100)
    )


def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    """Convert CMYK to an opaque RGB color."""
    k = cmyk.k / 100
    r = 255 * (1 - cmyk.c / 100) * (1 - k)
    g = 255 * (1 - cmyk.m / 100) * (1 - k)
    b = 255 * (1 - cmyk.y / 100) * (1 - k)

    return RGB(r=round_half_up(r), g=round_half_up(g), b=round_half_up(b), a=1.0)
