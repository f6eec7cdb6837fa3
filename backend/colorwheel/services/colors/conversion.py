"""
ColorWheel Color Model: RGB <-> HSV Conversion

This module holds the two immutable color value types used across the picker
(RGB with normalized channels, HSV with hue in degrees) and the conversion
functions between them. Hex helpers at the bottom are used by the service layer
to accept and emit #RRGGBB codes.
"""

import math
from dataclasses import dataclass
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .combinations import ColorCombination


# Channel spread at or below this is treated as grey (no hue)
ACHROMATIC_EPSILON = 0.00001

# Hue reported for achromatic colors
ACHROMATIC_HUE = 0.0


@dataclass(frozen=True)
class RGB:
    """Additive color with channels in [0, 1]."""
    r: float  # Percent [0, 1]
    g: float  # Percent [0, 1]
    b: float  # Percent [0, 1]

    @property
    def hsv(self) -> "HSV":
        return rgb_to_hsv(self.r, self.g, self.b)

    def additional_combination_colors(self, combination: "ColorCombination") -> List["RGB"]:
        from .harmony import additional_colors
        return additional_colors(self, combination)

    def all_combination_colors(self, combination: "ColorCombination") -> List["RGB"]:
        from .harmony import all_colors
        return all_colors(self, combination)


@dataclass(frozen=True)
class HSV:
    """Hue/saturation/value color; hue in degrees, s and v in [0, 1]."""
    h: float  # Angle in degrees
    s: float  # Percent [0, 1]
    v: float  # Percent [0, 1]

    @property
    def rgb(self) -> RGB:
        return hsv_to_rgb(self.h, self.s, self.v)

    def additional_combination_colors(self, combination: "ColorCombination") -> List["HSV"]:
        from .harmony import additional_colors
        return additional_colors(self, combination)

    def all_combination_colors(self, combination: "ColorCombination") -> List["HSV"]:
        from .harmony import all_colors
        return all_colors(self, combination)


def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """
    Convert normalized RGB channels to HSV.

    Args:
        r: Red [0, 1]
        g: Green [0, 1]
        b: Blue [0, 1]

    Returns:
        HSV with h in [0, 360), s and v in [0, 1]. Greys come back with
        h = 0 and s = 0.
    """
    min_c = min(r, g, b)
    max_c = max(r, g, b)

    v = max_c
    delta = max_c - min_c

    if delta <= ACHROMATIC_EPSILON:
        return HSV(h=ACHROMATIC_HUE, s=0.0, v=max_c)

    # Unreachable once delta > 0 with non-negative channels, kept for
    # negative inputs
    if max_c <= 0:
        return HSV(h=ACHROMATIC_HUE, s=0.0, v=v)

    s = delta / max_c

    # Sector checks run in r, g, b order so ties resolve to the earlier channel
    if r == max_c:
        sector = (g - b) / delta  # between yellow & magenta
    elif g == max_c:
        sector = 2 + (b - r) / delta  # between cyan & yellow
    else:
        sector = 4 + (r - g) / delta  # between magenta & cyan

    h = sector * 60
    if h < 0:
        h += 360

    return HSV(h=h, s=s, v=v)


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """
    Convert HSV to normalized RGB channels.

    Args:
        h: Hue in degrees, any real (wrapped into [0, 360))
        s: Saturation [0, 1]
        v: Value [0, 1]

    Returns:
        RGB with channels in [0, 1] for in-range s and v
    """
    if s == 0:
        return RGB(r=v, g=v, b=v)  # Achromatic grey

    angle = math.fmod(h, 360)
    if angle < 0:
        angle += 360

    sector = angle / 60
    i = math.floor(sector)
    f = sector - i  # Fractional part of h

    p = v * (1 - s)
    q = v * (1 - (s * f))
    t = v * (1 - (s * (1 - f)))

    i = i % 6
    if i == 0:
        return RGB(r=v, g=t, b=p)
    elif i == 1:
        return RGB(r=q, g=v, b=p)
    elif i == 2:
        return RGB(r=p, g=v, b=t)
    elif i == 3:
        return RGB(r=p, g=q, b=v)
    elif i == 4:
        return RGB(r=t, g=p, b=v)
    return RGB(r=v, g=p, b=q)


def clamp_unit(value: float) -> float:
    """Clamp a value into [0, 1]."""
    return max(0.0, min(1.0, value))


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Parse a #RRGGBB hex code into a normalized RGB color.

    Args:
        hex_color: Color in format #RRGGBB

    Returns:
        RGB with channels in [0, 1]

    Raises:
        ValueError: If the string is not a #RRGGBB code
    """
    if not isinstance(hex_color, str) or not hex_color.startswith('#') or len(hex_color) != 7:
        raise ValueError(f"Invalid hex color format: {hex_color}")

    hex_clean = hex_color[1:]
    try:
        r = int(hex_clean[0:2], 16) / 255.0
        g = int(hex_clean[2:4], 16) / 255.0
        b = int(hex_clean[4:6], 16) / 255.0
    except ValueError:
        raise ValueError(f"Invalid hex color format: {hex_color}")

    return RGB(r=r, g=g, b=b)


def rgb_to_hex(rgb: RGB) -> str:
    """
    Format an RGB color as an uppercase #RRGGBB code.

    Channels are clamped to [0, 1] before rounding to 8 bits.
    """
    r_int = round(clamp_unit(rgb.r) * 255)
    g_int = round(clamp_unit(rgb.g) * 255)
    b_int = round(clamp_unit(rgb.b) * 255)

    return f"#{r_int:02X}{g_int:02X}{b_int:02X}"
