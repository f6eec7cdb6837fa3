"""
ColorWheel Harmony Orchestrator

Coordinates a full harmony computation for the service layer: optional
brightness override, harmony derivation, hex formatting and indicator
placement, assembled into a response dictionary with timing metadata.
"""

import time
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from . import additional_colors
from .wheel import combination_indicators, polar_to_hsv
from ..combinations import ColorCombination, describe_combination
from ..conversion import HSV, RGB, hsv_to_rgb, rgb_to_hex


def describe_color(rgb: RGB, hsv: HSV, role: str, indicator: Dict[str, float]) -> Dict[str, Any]:
    """
    Build the output entry for a single color.

    Args:
        rgb: Color as RGB
        hsv: Same color as HSV (hue as derived, not re-converted)
        role: "base" or "harmony"
        indicator: Wheel placement for the color

    Returns:
        Dictionary with rgb, hsv, hex, role and indicator fields
    """
    return {
        "role": role,
        "hex": rgb_to_hex(rgb),
        "rgb": {"r": rgb.r, "g": rgb.g, "b": rgb.b},
        "hsv": {"h": hsv.h, "s": hsv.s, "v": hsv.v},
        "indicator": indicator,
    }


def generate_harmony(
    base: RGB,
    combination: ColorCombination = ColorCombination.SINGLE,
    brightness: Optional[float] = None
) -> Dict[str, Any]:
    """
    Generate the ordered color set for a base color and harmony scheme.

    Args:
        base: Base color as RGB
        combination: Harmony scheme
        brightness: Optional value replacing the base brightness before
            derivation

    Returns:
        Dictionary with base, combination, colors, processing_notes and debug
    """
    start_time = time.time()
    combination = ColorCombination(combination)
    processing_notes: List[str] = []

    base_hsv = base.hsv
    if base_hsv.s == 0:
        processing_notes.append("achromatic_base")

    if brightness is not None:
        base_hsv = HSV(h=base_hsv.h, s=base_hsv.s, v=brightness)
        base = hsv_to_rgb(base_hsv.h, base_hsv.s, base_hsv.v)
        processing_notes.append("brightness_applied")

    derivation_start = time.time()
    harmony_hsv = additional_colors(base_hsv, combination)
    indicators = combination_indicators(base_hsv, combination)
    derivation_time = time.time() - derivation_start

    colors = [describe_color(base, base_hsv, "base", asdict(indicators[0]))]
    for hsv, indicator in zip(harmony_hsv, indicators[1:]):
        colors.append(describe_color(hsv.rgb, hsv, "harmony", asdict(indicator)))

    total_time = time.time() - start_time

    return {
        "base": colors[0],
        "combination": describe_combination(combination),
        "colors": colors,
        "processing_notes": processing_notes or ["normal_processing"],
        "debug": {
            "timing_ms": {
                "derivation": round(derivation_time * 1000, 3),
                "total": round(total_time * 1000, 3),
            }
        },
    }


def generate_selection(
    angle: float,
    distance: float,
    brightness: float,
    combination: ColorCombination = ColorCombination.SINGLE
) -> Dict[str, Any]:
    """
    Resolve a polar wheel selection and derive its harmony set.

    Args:
        angle: Pointer angle in degrees
        distance: Normalized pointer distance (capped at 1)
        brightness: Current brightness
        combination: Harmony scheme

    Returns:
        Same structure as generate_harmony, plus the resolved selection HSV
    """
    selection = polar_to_hsv(angle, distance, brightness)
    result = generate_harmony(selection.rgb, combination)
    result["selection"] = {"h": selection.h, "s": selection.s, "v": selection.v}
    if distance > 1.0:
        result["processing_notes"].append("distance_capped")
    return result
