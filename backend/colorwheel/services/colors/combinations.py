"""
ColorWheel Color Combinations

Harmony schemes offered by the picker. Each scheme is a fixed list of hue
offsets in degrees, ordered from the most clockwise position relative to the
selected color.
"""

from enum import Enum
from typing import Dict, Tuple


class ColorCombination(str, Enum):
    """Supported harmony schemes."""
    SINGLE = "single"
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"

    @property
    def angles(self) -> Tuple[float, ...]:
        """Hue offsets in degrees, one per additional color."""
        return COMBINATION_ANGLES[self]

    @property
    def offset_count(self) -> int:
        return len(COMBINATION_ANGLES[self])

    @property
    def label(self) -> str:
        return COMBINATION_LABELS[self]

    @property
    def symbol_name(self) -> str:
        return COMBINATION_SYMBOLS[self]


COMBINATION_ANGLES: Dict[ColorCombination, Tuple[float, ...]] = {
    ColorCombination.SINGLE: (),
    ColorCombination.COMPLEMENTARY: (180.0,),
    ColorCombination.ANALOGOUS: (45.0, -45.0),
    ColorCombination.TRIADIC: (120.0, -120.0),
    ColorCombination.TETRADIC: (90.0, 180.0, -90.0),
}

COMBINATION_LABELS: Dict[ColorCombination, str] = {
    ColorCombination.SINGLE: "Single",
    ColorCombination.COMPLEMENTARY: "Complementary",
    ColorCombination.ANALOGOUS: "Analogous",
    ColorCombination.TRIADIC: "Triadic",
    ColorCombination.TETRADIC: "Tetradic",
}

# SF Symbols names used by the picker UI
COMBINATION_SYMBOLS: Dict[ColorCombination, str] = {
    ColorCombination.SINGLE: "die.face.1.fill",
    ColorCombination.COMPLEMENTARY: "die.face.2.fill",
    ColorCombination.ANALOGOUS: "die.face.2",
    ColorCombination.TRIADIC: "die.face.3.fill",
    ColorCombination.TETRADIC: "die.face.4.fill",
}


def describe_combination(combination: ColorCombination) -> Dict[str, object]:
    """
    Build the registry entry for a combination.

    Args:
        combination: Harmony scheme

    Returns:
        Dictionary with name, label, symbol and offsets
    """
    return {
        "name": combination.value,
        "label": combination.label,
        "symbol": combination.symbol_name,
        "angles": list(combination.angles),
        "offset_count": combination.offset_count,
    }
