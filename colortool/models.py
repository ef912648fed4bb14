"""Immutable color value types.

All models are frozen pydantic models with range-checked fields, so an
out-of-range component can never leave a conversion function: building
one raises ``pydantic.ValidationError`` (a ``ValueError`` subclass).

Ranges:
    - RGB: r, g, b in [0, 255]; a in [0, 1]
    - HSL: h in [0, 360); s, l in [0, 100]; a in [0, 1]
    - HSV: h in [0, 360); s, v in [0, 100]; a in [0, 1]
    - CMYK: c, m, y, k in [0, 100] (no alpha)

Hex values are plain ``str`` (``#`` followed by 3, 4, 6 or 8 hex digits).
"""

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


HEX_PATTERN = r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's ``round`` uses banker's rounding (``round(126.5) == 126``);
    color components are rounded the way CSS tooling does (``127``).
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, value))


class _ColorModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class RGB(_ColorModel):
    """sRGB color, 8 bits per channel, with straight alpha."""
    r: int = Field(..., ge=0, le=255, description="Red channel")
    g: int = Field(..., ge=0, le=255, description="Green channel")
    b: int = Field(..., ge=0, le=255, description="Blue channel")
    a: float = Field(1.0, ge=0.0, le=1.0, description="Alpha (1 = opaque)")


class HSL(_ColorModel):
    """Hue (degrees), saturation and lightness (percent)."""
    h: int = Field(..., ge=0, lt=360, description="Hue in degrees")
    s: int = Field(..., ge=0, le=100, description="Saturation in percent")
    l: int = Field(..., ge=0, le=100, description="Lightness in percent")
    a: float = Field(1.0, ge=0.0, le=1.0, description="Alpha (1 = opaque)")


class HSV(_ColorModel):
    """Hue (degrees), saturation and value (percent)."""
    h: int = Field(..., ge=0, lt=360, description="Hue in degrees")
    s: int = Field(..., ge=0, le=100, description="Saturation in percent")
    v: int = Field(..., ge=0, le=100, description="Value in percent")
    a: float = Field(1.0, ge=0.0, le=1.0, description="Alpha (1 = opaque)")


class CMYK(_ColorModel):
    """Process color in percent of ink coverage."""
    c: int = Field(..., ge=0, le=100, description="Cyan")
    m: int = Field(..., ge=0, le=100, description="Magenta")
    y: int = Field(..., ge=0, le=100, description="Yellow")
    k: int = Field(..., ge=0, le=100, description="Key (black)")


class NamedColor(_ColorModel):
    """One entry of the named-color table."""
    name: str = Field(..., min_length=1)
    hex: str = Field(..., pattern=r"^#[0-9a-f]{6}$", description="Lowercase 6-digit hex")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if v != v.lower() or v.strip() != v:
            raise ValueError(f"Color name must be lowercase without padding, got {v!r}")
        return v


class ClosestColor(_ColorModel):
    """Result of a nearest-named-color query."""
    name: str
    hex: str
    distance: float = Field(..., ge=0.0)
