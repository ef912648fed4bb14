"""Test hex string ↔ RGB codec.

Tests for colortool.hex_codec:
    - 3/4/6/8 digit decoding, with and without '#'
    - Alpha suffix → 2-decimal alpha
    - Lenient decode() falls back to black and logs a warning
    - decode_strict() raises InvalidHexError
    - encode() clamps, lowercases, and omits alpha when opaque
    - encode(decode(H)) == H for 6-digit hex

Run:
    pytest tests/test_hex_codec.py -v
"""

import logging

import pytest
from pydantic import ValidationError

from colortool import hex_codec
from colortool.hex_codec import InvalidHexError
from colortool.models import RGB


# ============================================================================
# DECODING
# ============================================================================

@pytest.mark.parametrize("hex_str,expected", [
    ("#ff0000", RGB(r=255, g=0, b=0, a=1.0)),
    ("ff0000", RGB(r=255, g=0, b=0, a=1.0)),
    ("#FF8000", RGB(r=255, g=128, b=0, a=1.0)),
    ("#abc", RGB(r=170, g=187, b=204, a=1.0)),
    ("#ff000080", RGB(r=255, g=0, b=0, a=0.5)),
    ("#f008", RGB(r=255, g=0, b=0, a=0.53)),
    ("#00000000", RGB(r=0, g=0, b=0, a=0.0)),
])
def test_decode_known_values(hex_str, expected):
    """Test decoding of every supported length."""
    assert hex_codec.decode(hex_str) == expected


def test_decode_red_scenario():
    """hexToRgb('#ff0000') → {r:255, g:0, b:0, a:1}."""
    rgb = hex_codec.decode("#ff0000")
    assert (rgb.r, rgb.g, rgb.b, rgb.a) == (255, 0, 0, 1.0)


@pytest.mark.parametrize("bad", ["#12345", "#1234567", "", "#", "#gggggg", "#ff 000", "#fff\n"])
def test_decode_malformed_returns_black(bad, caplog):
    """Test that malformed hex degrades to opaque black with a warning."""
    with caplog.at_level(logging.WARNING, logger="colortool.hex_codec"):
        rgb = hex_codec.decode(bad)

    assert rgb == RGB(r=0, g=0, b=0, a=1.0)
    assert "Malformed hex color" in caplog.text


@pytest.mark.parametrize("bad", ["#12345", "#gggggg", "", "##fff"])
def test_decode_strict_raises(bad):
    """Test that strict decoding reports malformed input."""
    with pytest.raises(InvalidHexError):
        hex_codec.decode_strict(bad)


def test_invalid_hex_error_is_value_error():
    """Callers catching ValueError also catch InvalidHexError."""
    with pytest.raises(ValueError, match="3, 4, 6 or 8 digits"):
        hex_codec.decode_strict("#12")


def test_decode_strict_accepts_valid():
    assert hex_codec.decode_strict("#0a0B0c") == RGB(r=10, g=11, b=12)


# ============================================================================
# VALIDATION
# ============================================================================

@pytest.mark.parametrize("text,valid", [
    ("#fff", True),
    ("#FFFA", True),
    ("#a1b2c3", True),
    ("#a1b2c3d4", True),
    ("fff", False),
    ("#fffff", False),
    ("#ggg", False),
    ("#a1b2c3d4e", False),
])
def test_is_valid_hex(text, valid):
    assert hex_codec.is_valid_hex(text) is valid


# ============================================================================
# ENCODING
# ============================================================================

def test_encode_opaque_is_six_digits():
    assert hex_codec.encode(RGB(r=255, g=0, b=0)) == "#ff0000"


def test_encode_lowercase():
    assert hex_codec.encode(RGB(r=171, g=205, b=239)) == "#abcdef"


def test_encode_alpha_suffix():
    """Test that translucent colors get a rounded alpha byte."""
    assert hex_codec.encode(RGB(r=255, g=0, b=0, a=0.5)) == "#ff000080"
    assert hex_codec.encode(RGB(r=0, g=0, b=0, a=0.0)) == "#00000000"


def test_encode_components_clamps():
    """Test clamping of out-of-range raw channels and alpha."""
    assert hex_codec.encode_components(300, -5, 127.5) == "#ff0080"
    assert hex_codec.encode_components(0, 0, 0, a=1.7) == "#000000"
    assert hex_codec.encode_components(0, 0, 0, a=-0.2) == "#00000000"


def test_rgb_model_rejects_out_of_range():
    """Out-of-range components cannot be constructed in the first place."""
    with pytest.raises(ValidationError):
        RGB(r=256, g=0, b=0)
    with pytest.raises(ValidationError):
        RGB(r=0, g=0, b=0, a=1.5)


# ============================================================================
# ROUND TRIP
# ============================================================================

@pytest.mark.parametrize("hex_str", [
    "#000000", "#ffffff", "#ff0000", "#00ff00", "#0000ff",
    "#123456", "#abcdef", "#7f7f7f", "#80ff00", "#663399",
])
def test_encode_decode_roundtrip(hex_str):
    """Test encode(decode(H)) == H for 6-digit lowercase hex."""
    assert hex_codec.encode(hex_codec.decode(hex_str)) == hex_str
