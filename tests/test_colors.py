"""Tests for the color value types."""
import dataclasses

import pytest

from tincture_colors import (
    ALL_COLOR_TYPES,
    HUE_COLOR_TYPES,
    HLS,
    HSV,
    LAB,
    LCHab,
    LCHuv,
    LUV,
    RGB,
    XYZ,
    Color,
    Colour,
    is_color,
)


class TestConstruction:
    """Default and full constructors."""

    @pytest.mark.parametrize("cls", ALL_COLOR_TYPES)
    def test_default_is_zero(self, cls):
        assert cls().components() == (0.0, 0.0, 0.0)

    @pytest.mark.parametrize("cls", ALL_COLOR_TYPES)
    def test_fields_are_floats(self, cls):
        c = cls(1, 2, 3)
        assert c.components() == (1.0, 2.0, 3.0)
        assert all(type(v) is float for v in c.components())

    def test_no_range_validation(self):
        """Out-of-range values are accepted and stored unchanged."""
        c = RGB(2.0, -1.0, 5.0)
        assert (c.r, c.g, c.b) == (2.0, -1.0, 5.0)
        lab = LAB(120.0, -400.0, 400.0)
        assert lab.a == -400.0

    def test_field_names(self):
        assert RGB.fields == ("r", "g", "b")
        assert HSV.fields == ("h", "s", "v")
        assert HLS.fields == ("h", "l", "s")
        assert XYZ.fields == ("x", "y", "z")
        assert LAB.fields == ("l", "a", "b")
        assert LCHab.fields == ("l", "c", "h")
        assert LUV.fields == ("l", "u", "v")
        assert LCHuv.fields == ("l", "c", "h")

    def test_keyword_construction(self):
        c = HLS(h=120, l=0.5, s=1)
        assert c.components() == (120.0, 0.5, 1.0)


class TestImmutability:

    def test_frozen(self):
        c = RGB(0.1, 0.2, 0.3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.r = 0.5

    def test_no_extra_attributes(self):
        c = XYZ(0.1, 0.2, 0.3)
        with pytest.raises((AttributeError, TypeError)):
            c.w = 1.0


class TestComponents:

    @pytest.mark.parametrize("cls", ALL_COLOR_TYPES)
    def test_from_components_inverse(self, cls):
        c = cls(0.25, 0.5, 0.75)
        assert cls.from_components(c.components()) == c

    def test_from_components_wrong_length(self):
        with pytest.raises(ValueError, match="expects 3 components"):
            LAB.from_components([1.0, 2.0])


class TestEquality:

    def test_value_equality(self):
        assert RGB(1, 0, 0) == RGB(1.0, 0.0, 0.0)
        assert hash(RGB(1, 0, 0)) == hash(RGB(1.0, 0.0, 0.0))

    def test_different_types_not_equal(self):
        assert RGB(0, 0, 0) != XYZ(0, 0, 0)

    def test_usable_in_sets(self):
        assert len({RGB(1, 0, 0), RGB(1, 0, 0), RGB(0, 1, 0)}) == 2


class TestMetadata:

    def test_all_types(self):
        assert len(ALL_COLOR_TYPES) == 8
        assert all(issubclass(t, Color) for t in ALL_COLOR_TYPES)

    def test_hue_types(self):
        assert set(HUE_COLOR_TYPES) == {HSV, HLS, LCHab, LCHuv}
        assert HSV.hue_index == 0 and HLS.hue_index == 0
        assert LCHab.hue_index == 2 and LCHuv.hue_index == 2
        assert LAB().has_hue is False
        assert LCHuv().has_hue is True

    def test_colour_alias(self):
        assert Colour is Color
        assert isinstance(RGB(), Colour)

    def test_is_color(self):
        assert is_color(LUV())
        assert not is_color((0.0, 0.0, 0.0))


class TestMethods:

    def test_convert_method(self):
        assert RGB(1, 0, 0).convert(HSV) == HSV(0, 1, 1)

    def test_hex_method(self):
        assert HSV(120, 1, 1).hex() == "#00FF00"


class TestAbout:

    def test_metadata_summary(self):
        from __about__ import __version__, metadata_summary
        info = metadata_summary()
        assert info["title"] == "Tincture"
        assert info["version"] == __version__
