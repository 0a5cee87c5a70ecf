"""
Unit tests for color parsing and palette derivation.
"""

import pytest

from calgrid.color import (
    BLACK,
    WHITE,
    default_palette,
    derive_palette,
    normalize_color,
    parse_hex_color,
    relative_luminance,
)
from calgrid.errors import InvalidColorFormat


class TestParseHexColor:
    def test_long_form(self):
        assert parse_hex_color("#3B82F6") == (59, 130, 246)

    def test_shorthand_and_missing_hash(self):
        assert parse_hex_color("#38F") == (0x33, 0x88, 0xFF)
        assert parse_hex_color("3b82f6") == (59, 130, 246)

    @pytest.mark.parametrize("bad", ["", "#12", "#12345", "#GGGGGG", "blue", None])
    def test_invalid(self, bad):
        with pytest.raises(InvalidColorFormat):
            parse_hex_color(bad)

    def test_normalize(self):
        assert normalize_color("3b82f6") == "#3B82F6"
        assert normalize_color(" #38f ") == "#3388FF"


class TestDerivePalette:
    """Tests for the derived variants of a base color."""

    def test_blue(self):
        palette = derive_palette("#3B82F6")

        assert palette["base"] == "#3B82F6"
        assert palette["light"] == "#629BF8"
        assert palette["dark"] == "#2F68C5"
        assert palette["darker"] == "#234E94"
        assert palette["contrast"] == WHITE

    def test_opacity_stops(self):
        palette = derive_palette("#3B82F6")

        assert list(palette["opacity"]) == [10, 20, 30, 50, 70, 90]
        assert palette["opacity"][10] == "rgba(59, 130, 246, 0.1)"
        assert palette["opacity"][50] == "rgba(59, 130, 246, 0.5)"

    def test_light_base_gets_black_text(self):
        assert derive_palette("#EAB308")["contrast"] == BLACK
        assert derive_palette("#FFFFFF")["contrast"] == BLACK

    def test_channels_stay_in_range(self):
        assert derive_palette("#FFFFFF")["light"] == "#FFFFFF"
        assert derive_palette("#000000")["darker"] == "#000000"
        assert derive_palette("#000000")["contrast"] == WHITE

    def test_luminance_threshold(self):
        assert relative_luminance((255.0, 255.0, 255.0)) == pytest.approx(1.0)
        assert relative_luminance((0.0, 0.0, 0.0)) == 0.0

    def test_invalid_base(self):
        with pytest.raises(InvalidColorFormat):
            derive_palette("not-a-color")

    def test_default_palette(self):
        palette = default_palette()

        assert palette["base"] == "#6B7280"
        assert palette["light"] == "#9CA3AF"
        assert palette["contrast"] == WHITE
        assert palette["opacity"][30] == "rgba(107, 114, 128, 0.3)"
