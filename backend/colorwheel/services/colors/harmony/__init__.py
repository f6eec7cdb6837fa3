"""
ColorWheel Harmony Engine

Derives harmony color sets from a base color by rotating its hue through the
offsets of a ColorCombination. Works on either representation: HSV bases give
HSV results, RGB bases are converted once, rotated in HSV and converted back.
"""

import math
from typing import List, Union

from ..combinations import ColorCombination
from ..conversion import HSV, RGB


Color = Union[RGB, HSV]


def normalize_hue(h: float) -> float:
    """
    Wrap a hue into [0, 360).

    Args:
        h: Hue in degrees, any real

    Returns:
        Equivalent hue in [0, 360)
    """
    angle = math.fmod(h, 360.0)
    if angle < 0:
        angle += 360.0
    # -1e-20 + 360 rounds to 360
    if angle >= 360.0:
        angle -= 360.0
    return angle


def rotate_hue(base: HSV, offset_degrees: float) -> HSV:
    """
    Rotate a color clockwise around the wheel.

    Offsets are clockwise-positive, so the hue is decreased by the offset.
    The raw result is not wrapped; conversion to RGB handles any real hue.

    Args:
        base: Color to rotate
        offset_degrees: Clockwise offset in degrees

    Returns:
        New HSV with the same saturation and value
    """
    return HSV(h=base.h - offset_degrees, s=base.s, v=base.v)


def _additional_hsv(base: HSV, combination: ColorCombination) -> List[HSV]:
    return [rotate_hue(base, offset) for offset in combination.angles]


def additional_colors(base: Color, combination: ColorCombination) -> List[Color]:
    """
    Generate the harmony colors that accompany a base color.

    Args:
        base: Base color as RGB or HSV
        combination: Harmony scheme

    Returns:
        One color per offset of the scheme, in offset order, in the same
        representation as the base. Empty for ColorCombination.SINGLE.
    """
    combination = ColorCombination(combination)

    if isinstance(base, HSV):
        return _additional_hsv(base, combination)
    if isinstance(base, RGB):
        return [color.rgb for color in _additional_hsv(base.hsv, combination)]
    raise TypeError(f"Expected RGB or HSV, got {type(base).__name__}")


def all_colors(base: Color, combination: ColorCombination) -> List[Color]:
    """
    Base color followed by its harmony colors.

    Args:
        base: Base color as RGB or HSV
        combination: Harmony scheme

    Returns:
        List of 1 + offset_count colors with the base first
    """
    return [base] + additional_colors(base, combination)


def hue_separation(h1: float, h2: float) -> float:
    """
    Calculate the minimum angular separation between two hues.

    Args:
        h1: First hue in degrees
        h2: Second hue in degrees

    Returns:
        Minimum separation in degrees [0, 180]
    """
    diff = abs(normalize_hue(h1) - normalize_hue(h2))

    # Consider wraparound (smaller of direct or wraparound distance)
    return min(diff, 360.0 - diff)


__all__ = [
    "Color",
    "normalize_hue",
    "rotate_hue",
    "additional_colors",
    "all_colors",
    "hue_separation",
]
