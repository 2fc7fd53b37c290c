"""Tests for color literal parsing and hex / CSS / JSON output."""
import json

import pytest

from tincture_colors import HLS, HSV, LAB, RGB
from tincture_format import cssfmt, to_hex, to_json
from tincture_names import X11_COLORS
from tincture_parse import UnknownColorError, color, colour, try_color


def rgb255(r, g, b):
    return RGB(r / 255.0, g / 255.0, b / 255.0)


class TestParseHex:

    @pytest.mark.parametrize("text", ["#FF0000", "#ff0000", "0xFF0000", "0xff0000"])
    def test_six_digit(self, text):
        assert color(text) == RGB(1, 0, 0)

    def test_three_digit_expands_each_digit(self):
        assert color("#F00") == RGB(1, 0, 0)
        assert color("#fff") == RGB(1, 1, 1)
        assert color("0x0F0") == RGB(0, 1, 0)
        assert color("#8a3") == rgb255(0x88, 0xAA, 0x33)

    def test_mixed_channels(self):
        assert color("#1A2B3C") == rgb255(0x1A, 0x2B, 0x3C)

    @pytest.mark.parametrize("text", ["#FF00", "#FF00000", "#GG0000", "FF0000", "0x", "#"])
    def test_malformed(self, text):
        with pytest.raises(UnknownColorError):
            color(text)


class TestParseRgbFunction:

    def test_basic(self):
        assert color("rgb(0,255,0)") == RGB(0, 1, 0)

    def test_whitespace_and_case(self):
        assert color("RGB( 0, 255, 0 )") == RGB(0, 1, 0)
        assert color("  rgb(10 ,20, 30)\n") == rgb255(10, 20, 30)

    @pytest.mark.parametrize("text", ["rgb(256,0,0)", "rgb(-1,0,0)", "rgb(0.5,0,0)", "rgb(1,2)"])
    def test_rejected(self, text):
        with pytest.raises(UnknownColorError):
            color(text)


class TestParseNames:

    def test_basic_names(self):
        assert color("red") == RGB(1, 0, 0)
        assert color("RED") == RGB(1, 0, 0)
        assert color("white") == RGB(1, 1, 1)

    def test_numbered_grays(self):
        assert color("gray50") == rgb255(127, 127, 127)
        assert color("grey100") == RGB(1, 1, 1)

    def test_spaces_are_ignored(self):
        assert color("Light Blue") == rgb255(173, 216, 230)
        assert color("navy blue") == color("NavyBlue")

    def test_table_is_normalised(self):
        assert len(X11_COLORS) > 600
        for name, rgb in X11_COLORS.items():
            assert name == name.lower()
            assert " " not in name
            assert all(0 <= v <= 255 for v in rgb)

    def test_unknown_name(self):
        with pytest.raises(UnknownColorError, match="not-a-color"):
            color("not-a-color")


class TestParseApi:

    def test_error_is_value_error(self):
        with pytest.raises(ValueError) as excinfo:
            color("chartreuse-ish")
        assert excinfo.value.desc == "chartreuse-ish"
        assert "chartreuse-ish" in str(excinfo.value)

    def test_non_string(self):
        with pytest.raises(TypeError):
            color(42)

    def test_color_passes_through(self):
        c = LAB(50, 10, 10)
        assert color(c) is c
        assert try_color(c) is c

    def test_try_color(self):
        assert try_color("#00F") == RGB(0, 0, 1)
        assert try_color("nonsense") is None

    def test_colour_alias(self):
        assert colour is color
        assert colour("blue") == RGB(0, 0, 1)

    def test_channels_in_unit_range(self):
        for name in ("red", "orange", "gray37", "darkslategrey"):
            assert all(0.0 <= v <= 1.0 for v in color(name).components())


class TestHex:

    def test_primaries(self):
        assert to_hex(RGB(1, 0, 0)) == "#FF0000"
        assert to_hex(RGB(0, 0, 0)) == "#000000"
        assert to_hex(RGB(1, 1, 1)) == "#FFFFFF"

    def test_out_of_range_is_clamped(self):
        assert to_hex(RGB(2, -1, 0.5)) == "#FF0080"

    def test_rounds_half_up(self):
        assert to_hex(RGB(0.5, 0.5, 0.5)) == "#808080"
        assert to_hex(rgb255(17, 34, 51)) == "#112233"

    def test_other_spaces(self):
        assert to_hex(HSV(120, 1, 1)) == "#00FF00"
        assert to_hex(HLS(240, 0.5, 1)) == "#0000FF"
        assert to_hex(LAB(100, 0, 0)) == "#FFFFFF"

    def test_parse_then_format(self):
        for text in ("#1A2B3C", "#FFFFFF", "#0080FF"):
            assert to_hex(color(text)) == text

    def test_hex_method(self):
        assert color("navy").hex() == "#000080"


class TestCssJson:

    def test_cssfmt(self):
        assert cssfmt(RGB(0, 0, 1)) == "#0000FF"
        assert cssfmt(None) == "none"

    def test_json(self):
        assert to_json(RGB(1, 0, 0)) == '"#FF0000"'
        assert json.loads(to_json(HSV(60, 1, 1))) == "#FFFF00"
        assert to_json(None) == '"none"'
