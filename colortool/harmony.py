"""Color harmony schemes derived from a seed color.

All schemes work in HSL, where a harmony is either a hue rotation
(complementary, analogous, triad, tetrad) or a lightness ramp at fixed hue
and saturation (shades, tints). Generated colors are returned as lowercase
hex; the seed itself is echoed exactly as passed in.

Defaults for ``count`` and ``angle`` come from the ``harmony`` section of
the settings.

Analogous ordering
------------------
Neighbours are inserted around the seed: clockwise ones are appended,
counter-clockwise ones prepended, then the list is cut to ``count``::

    count=3 → [h-30, seed, h+30]
    count=4 → [h-60, h-30, seed, h+30]

For even counts the extra clockwise color appended at ``(half+1)·angle``
falls outside the cut, so the result leans counter-clockwise.

Counts
------
``count == 1`` yields ``[seed]``. ``count < 1`` raises ValueError. This
also avoids the ``100 / (count - 1)`` division in shades and tints.
"""

from typing import Callable, Dict, List, Optional

from .configs.loader import get_settings
from .hex_codec import encode
from .models import HSL, clamp
from .rgb_converter import hsl_values_to_rgb
from .space_bridge import hex_to_hsl


def _rotated(hsl: HSL, degrees: float) -> str:
    return encode(hsl_values_to_rgb((hsl.h + degrees) % 360, hsl.s, hsl.l, hsl.a))


def _with_lightness(hsl: HSL, lightness: float) -> str:
    return encode(hsl_values_to_rgb(hsl.h, hsl.s, clamp(lightness, 0, 100), hsl.a))


def _check_count(count: int) -> None:
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")


def complementary(hex_str: str) -> str:
    """Color opposite the seed on the hue wheel (+180°)."""
    return _rotated(hex_to_hsl(hex_str), 180)


def analogous(hex_str: str, count: Optional[int] = None, angle: Optional[float] = None) -> List[str]:
    """Neighbouring hues around the seed.

    Parameters
    ----------
    hex_str : str
        Seed color
    count : int, optional
        Number of colors, including the seed (settings default: 3)
    angle : float, optional
        Hue step between neighbours in degrees (settings default: 30)

    Returns
    -------
    list of str
        ``count`` colors, counter-clockwise neighbours first (see module docs)

    Raises
    ------
    ValueError
        If count < 1
    """
    defaults = get_settings().harmony
    count = defaults.analogous_count if count is None else count
    angle = defaults.analogous_angle if angle is None else angle
    _check_count(count)

    hsl = hex_to_hsl(hex_str)
    colors = [hex_str]
    half = count // 2

    for i in range(1, half + 1):
        colors.append(_rotated(hsl, i * angle))
        colors.insert(0, _rotated(hsl, -i * angle))

    if count % 2 == 0:
        colors.append(_rotated(hsl, (half + 1) * angle))

    return colors[:count]


def triad(hex_str: str) -> List[str]:
    """Seed plus the hues 120° and 240° away."""
    hsl = hex_to_hsl(hex_str)
    return [hex_str, _rotated(hsl, 120), _rotated(hsl, 240)]


def tetrad(hex_str: str) -> List[str]:
    """Seed plus the hues 90°, 180° and 270° away (two complementary pairs)."""
    hsl = hex_to_hsl(hex_str)
    return [hex_str, _rotated(hsl, 90), _rotated(hsl, 180), _rotated(hsl, 270)]


def shades(hex_str: str, count: Optional[int] = None) -> List[str]:
    """Lightness ramp from 100% down to 0% at the seed's hue and saturation.

    The first entry is white and the last black; ``count == 1`` returns
    ``[hex_str]``.
    """
    count = get_settings().harmony.shade_count if count is None else count
    _check_count(count)
    if count == 1:
        return [hex_str]

    hsl = hex_to_hsl(hex_str)
    step = 100 / (count - 1)
    return [_with_lightness(hsl, 100 - i * step) for i in range(count)]


def tints(hex_str: str, count: Optional[int] = None) -> List[str]:
    """Lightness ramp from 50% up to 100% at the seed's hue and saturation.

    ``count == 1`` returns ``[hex_str]``.
    """
    count = get_settings().harmony.tint_count if count is None else count
    _check_count(count)
    if count == 1:
        return [hex_str]

    hsl = hex_to_hsl(hex_str)
    step = 50 / (count - 1)
    return [_with_lightness(hsl, 50 + i * step) for i in range(count)]


SCHEMES: Dict[str, Callable[[str], List[str]]] = {
    "complementary": lambda hex_str: [hex_str, complementary(hex_str)],
    "analogous": analogous,
    "triad": triad,
    "tetrad": tetrad,
    "shades": shades,
    "tints": tints,
}


def scheme(hex_str: str, name: str) -> List[str]:
    """Generate a scheme by name with default parameters.

    Raises
    ------
    ValueError
        If ``name`` is not one of SCHEMES
    """
    try:
        generate = SCHEMES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown harmony scheme '{name}'. Use one of {sorted(SCHEMES)}."
        ) from None
    return generate(hex_str)
