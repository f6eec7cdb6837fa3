"""
ColorWheel Wheel Geometry

Translates between positions on the circular picker and colors. A pointer at
polar coordinates (angle, distance) maps to hue = angle and saturation =
distance; indicators for a color are placed at angle = -hue (screen rotation
is clockwise) and distance proportional to saturation.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

from . import normalize_hue
from ..combinations import ColorCombination
from ..conversion import HSV, RGB, hsv_to_rgb


Point = Tuple[float, float]


@dataclass(frozen=True)
class Indicator:
    """Placement of a color marker on the wheel."""
    angle: float  # Rotation in degrees, clockwise-positive on screen
    distance: float  # Fraction of the wheel radius [0, 1]


def atan2_to_360(angle: float) -> float:
    """
    Convert an atan2 result in radians to degrees in [0, 360).

    Args:
        angle: Angle in radians as returned by math.atan2 (-pi, pi]

    Returns:
        Angle in degrees
    """
    result = angle
    if result < 0:
        result = (2 * math.pi) + angle
    return result * 180 / math.pi


def point_distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    x_dist = a[0] - b[0]
    y_dist = a[1] - b[1]
    return math.sqrt(x_dist * x_dist + y_dist * y_dist)


def polar_to_hsv(angle: float, distance: float, brightness: float) -> HSV:
    """
    Map a polar wheel position to HSV.

    Args:
        angle: Angle from the wheel centre in degrees
        distance: Normalized distance from the centre; values past the rim
            are capped at 1
        brightness: Current brightness, used as value

    Returns:
        HSV for that position
    """
    return HSV(h=angle, s=min(distance, 1.0), v=brightness)


def select_color(angle: float, distance: float, brightness: float) -> RGB:
    """Color under a polar wheel position."""
    return polar_to_hsv(angle, distance, brightness).rgb


def select_color_at_point(point: Point, center: Point, radius: float, brightness: float) -> RGB:
    """
    Color under a screen point on a wheel of the given diameter.

    Screen y grows downwards, so it is flipped before taking the angle.

    Args:
        point: Pointer location (x, y)
        center: Wheel centre (x, y)
        radius: Wheel frame size; the usable radius is radius / 2
        brightness: Current brightness [0, 1]

    Returns:
        Selected RGB color
    """
    y = center[1] - point[1]
    x = point[0] - center[0]

    hue = atan2_to_360(math.atan2(y, x))
    distance = point_distance(center, point) / (radius / 2)

    return select_color(hue, distance, brightness)


def apply_brightness(color: RGB, brightness: float) -> RGB:
    """
    Replace the value of a color while keeping its hue and saturation.

    Args:
        color: Current selection
        brightness: New value [0, 1]

    Returns:
        Recomputed RGB color
    """
    hsv = color.hsv
    return hsv_to_rgb(hsv.h, hsv.s, brightness)


def indicator_position(color: HSV) -> Indicator:
    """Marker placement for a single color."""
    return Indicator(angle=-color.h, distance=color.s)


def combination_indicators(base: HSV, combination: ColorCombination) -> List[Indicator]:
    """
    Marker placements for a base color and its harmony colors.

    Harmony markers are rotated from the base marker by each offset, which
    lands them at -hue of the corresponding rotated color.

    Args:
        base: Selected color
        combination: Harmony scheme

    Returns:
        Base indicator followed by one indicator per offset
    """
    combination = ColorCombination(combination)
    main = indicator_position(base)
    return [main] + [
        Indicator(angle=main.angle + offset, distance=base.s)
        for offset in combination.angles
    ]


def indicator_offset(indicator: Indicator, radius: float, stroke_width: float = 0.0) -> Point:
    """
    Screen offset of an indicator from the wheel centre.

    Args:
        indicator: Indicator placement
        radius: Wheel frame size; markers travel up to radius / 2
        stroke_width: Marker stroke width, kept inside the rim

    Returns:
        (dx, dy) in screen coordinates (y down)
    """
    reach = ((radius / 2) - (stroke_width * 2)) * indicator.distance
    theta = math.radians(normalize_hue(indicator.angle))
    return (reach * math.cos(theta), reach * math.sin(theta))
