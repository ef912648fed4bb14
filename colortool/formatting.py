"""CSS-style display strings for color values.

Alpha is shown (to 2 decimals) only when the color is not fully opaque.
HSV and CMYK have no CSS syntax; their strings follow the same shape for
display purposes only and are not accepted by parser.parse().
"""

from .models import CMYK, HSL, HSV, RGB


def format_rgb(rgb: RGB) -> str:
    if rgb.a < 1:
        return f"rgba({rgb.r}, {rgb.g}, {rgb.b}, {rgb.a:.2f})"
    return f"rgb({rgb.r}, {rgb.g}, {rgb.b})"


def format_hsl(hsl: HSL) -> str:
    if hsl.a < 1:
        return f"hsla({hsl.h}, {hsl.s}%, {hsl.l}%, {hsl.a:.2f})"
    return f"hsl({hsl.h}, {hsl.s}%, {hsl.l}%)"


def format_hsv(hsv: HSV) -> str:
    alpha = f", {hsv.a:.2f}" if hsv.a < 1 else ""
    return f"hsv({hsv.h}, {hsv.s}%, {hsv.v}%{alpha})"


def format_cmyk(cmyk: CMYK) -> str:
    return f"cmyk({cmyk.c}%, {cmyk.m}%, {cmyk.y}%, {cmyk.k}%)"


def as_css_variable(hex_str: str) -> str:
    """Hex value without ``#``, for use inside CSS custom property names."""
    return hex_str.replace('#', '')
