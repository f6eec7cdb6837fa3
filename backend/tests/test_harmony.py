"""
Unit tests for the Color Harmony Engine

Tests the combination registry, hue rotation conventions and harmony
derivation for both HSV and RGB bases.
"""

import pytest
from colorwheel.services.colors.combinations import ColorCombination, describe_combination
from colorwheel.services.colors.conversion import RGB, HSV
from colorwheel.services.colors.harmony import (
    normalize_hue, rotate_hue, additional_colors, all_colors, hue_separation
)


class TestCombinationRegistry:
    """Test the ColorCombination angle table and metadata."""

    def test_offsets(self):
        assert ColorCombination.SINGLE.angles == ()
        assert ColorCombination.COMPLEMENTARY.angles == (180,)
        assert ColorCombination.ANALOGOUS.angles == (45, -45)
        assert ColorCombination.TRIADIC.angles == (120, -120)
        assert ColorCombination.TETRADIC.angles == (90, 180, -90)

    def test_offset_counts(self):
        counts = {c: c.offset_count for c in ColorCombination}
        assert counts == {
            ColorCombination.SINGLE: 0,
            ColorCombination.COMPLEMENTARY: 1,
            ColorCombination.ANALOGOUS: 2,
            ColorCombination.TRIADIC: 2,
            ColorCombination.TETRADIC: 3,
        }

    def test_offsets_are_immutable(self):
        with pytest.raises(TypeError):
            ColorCombination.TETRADIC.angles[0] = 0

    def test_declaration_order(self):
        assert [c.value for c in ColorCombination] == [
            "single", "complementary", "analogous", "triadic", "tetradic"
        ]

    def test_labels_and_symbols(self):
        """Each scheme has exactly one label and one symbol."""
        assert ColorCombination.ANALOGOUS.label == "Analogous"
        assert ColorCombination.TETRADIC.symbol_name == "die.face.4.fill"
        labels = {c.label for c in ColorCombination}
        symbols = {c.symbol_name for c in ColorCombination}
        assert len(labels) == len(symbols) == len(ColorCombination)

    def test_lookup_by_name(self):
        assert ColorCombination("triadic") is ColorCombination.TRIADIC
        with pytest.raises(ValueError):
            ColorCombination("pentagonal")

    def test_describe_combination(self):
        entry = describe_combination(ColorCombination.COMPLEMENTARY)
        assert entry == {
            "name": "complementary",
            "label": "Complementary",
            "symbol": "die.face.2.fill",
            "angles": [180.0],
            "offset_count": 1,
        }


class TestHueRotation:
    """Test hue rotation mathematics."""

    def test_rotation_is_clockwise_subtraction(self):
        rotated = rotate_hue(HSV(100, 0.5, 0.5), 90)
        assert rotated == HSV(10, 0.5, 0.5)

    def test_rotation_keeps_saturation_and_value(self):
        rotated = rotate_hue(HSV(200, 0.3, 0.7), -45)
        assert rotated.s == 0.3
        assert rotated.v == 0.7
        assert rotated.h == 245

    def test_normalize_hue(self):
        assert normalize_hue(-80) == pytest.approx(280)
        assert normalize_hue(720) == 0
        assert normalize_hue(359.5) == 359.5
        assert 0 <= normalize_hue(-1e-20) < 360

    def test_hue_separation(self):
        """Separation takes the shorter way around the wheel."""
        assert hue_separation(0, 180) == pytest.approx(180)
        assert hue_separation(350, 10) == pytest.approx(20)
        assert hue_separation(-30, 30) == pytest.approx(60)


class TestHarmonyDerivation:
    """Test harmony color generation."""

    @pytest.mark.parametrize("combination", list(ColorCombination))
    def test_cardinality(self, combination):
        base = HSV(30, 0.6, 0.9)
        assert len(additional_colors(base, combination)) == combination.offset_count
        assert len(all_colors(base, combination)) == 1 + combination.offset_count

    def test_single_has_no_additional_colors(self):
        assert additional_colors(HSV(10, 1, 1), ColorCombination.SINGLE) == []
        assert additional_colors(RGB(1, 0, 0), ColorCombination.SINGLE) == []

    def test_single_all_colors_is_base(self):
        hsv = HSV(10, 1, 1)
        rgb = RGB(0.2, 0.3, 0.4)
        assert all_colors(hsv, ColorCombination.SINGLE) == [hsv]
        assert all_colors(rgb, ColorCombination.SINGLE) == [rgb]

    def test_tetradic_order(self):
        """Harmony colors follow the clockwise offset order."""
        colors = additional_colors(HSV(100, 0.5, 0.5), ColorCombination.TETRADIC)
        hues = [normalize_hue(c.h) for c in colors]
        assert hues == pytest.approx([10, 280, 190])
        assert all(c.s == 0.5 and c.v == 0.5 for c in colors)

    def test_analogous_and_triadic_offsets(self):
        base = HSV(200, 1, 1)
        analogous = additional_colors(base, ColorCombination.ANALOGOUS)
        triadic = additional_colors(base, ColorCombination.TRIADIC)
        assert [c.h for c in analogous] == [155, 245]
        assert [c.h for c in triadic] == [80, 320]

    def test_complementary_of_red_is_cyan(self):
        red = HSV(0, 1, 1)
        complementary = additional_colors(red, ColorCombination.COMPLEMENTARY)[0]
        assert normalize_hue(complementary.h) == 180
        rgb = complementary.rgb
        assert (rgb.r, rgb.g, rgb.b) == pytest.approx((0, 1, 1))

    def test_rgb_base_returns_rgb(self):
        colors = all_colors(RGB(1, 0, 0), ColorCombination.COMPLEMENTARY)
        assert colors[0] == RGB(1, 0, 0)
        assert isinstance(colors[1], RGB)
        assert (colors[1].r, colors[1].g, colors[1].b) == pytest.approx((0, 1, 1))

    def test_rgb_matches_hsv_derivation(self):
        """The RGB variant equals deriving in HSV and converting each result."""
        base = RGB(0.8, 0.3, 0.1)
        via_rgb = additional_colors(base, ColorCombination.TETRADIC)
        via_hsv = [c.rgb for c in additional_colors(base.hsv, ColorCombination.TETRADIC)]
        assert via_rgb == via_hsv

    def test_achromatic_base_stays_grey(self):
        grey = RGB(0.5, 0.5, 0.5)
        for color in additional_colors(grey, ColorCombination.TRIADIC):
            assert color == grey

    def test_accepts_combination_name(self):
        colors = additional_colors(HSV(0, 1, 1), "complementary")
        assert len(colors) == 1

    def test_rejects_unknown_color_type(self):
        with pytest.raises(TypeError):
            additional_colors((1, 0, 0), ColorCombination.COMPLEMENTARY)

    def test_value_type_methods(self):
        base = HSV(60, 0.4, 0.6)
        assert base.all_combination_colors(ColorCombination.ANALOGOUS) == \
            all_colors(base, ColorCombination.ANALOGOUS)
        rgb = RGB(0.1, 0.5, 0.9)
        assert rgb.additional_combination_colors(ColorCombination.TRIADIC) == \
            additional_colors(rgb, ColorCombination.TRIADIC)
