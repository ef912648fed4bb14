"""colortool: color-space conversion and harmony library.

Backs the color converter page of the developer-tools suite: conversions
between RGB, HSL, HSV, CMYK and hex, harmony palettes, WCAG contrast
checks, color-string parsing and nearest named color.

Architecture layers (strict one-way dependency):
    harmony, contrast, parser, named_colors, formatting
        → space_bridge → hex_codec, rgb_converter → models
    configs → utils

Key invariants:
    - Every function is pure; nothing is cached except the read-only
      settings and named-color table
    - Value types are frozen pydantic models; out-of-range components
      cannot be constructed
    - Malformed hex degrades to black in decode(); decode_strict() raises

Convenience imports:
    from colortool import hex_codec, harmony, contrast
    from colortool import parse, closest, contrast_ratio
"""

__version__ = "1.0.0"

from . import contrast
from . import formatting
from . import harmony
from . import hex_codec
from . import models
from . import named_colors
from . import parser
from . import rgb_converter
from . import space_bridge

from .configs.loader import ConfigError, get_settings, load_settings
from .contrast import contrast_ratio, is_wcag_aa_compliant, is_wcag_aaa_compliant, relative_luminance
from .hex_codec import InvalidHexError, decode, decode_strict, encode
from .models import CMYK, HSL, HSV, RGB, ClosestColor, NamedColor
from .named_colors import closest
from .parser import parse

__all__ = [
    # Modules
    'contrast',
    'formatting',
    'harmony',
    'hex_codec',
    'models',
    'named_colors',
    'parser',
    'rgb_converter',
    'space_bridge',
    # Types
    'RGB',
    'HSL',
    'HSV',
    'CMYK',
    'NamedColor',
    'ClosestColor',
    # Errors
    'ConfigError',
    'InvalidHexError',
    # Direct exports
    'decode',
    'decode_strict',
    'encode',
    'parse',
    'closest',
    'contrast_ratio',
    'relative_luminance',
    'is_wcag_aa_compliant',
    'is_wcag_aaa_compliant',
    'get_settings',
    'load_settings',
]
