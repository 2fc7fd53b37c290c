"""Tests for ordering and weighted means."""
import warnings

import pytest

from tincture_colors import HLS, HSV, LAB, LCHab, LUV, RGB, XYZ
from tincture_colorengine import convert
from tincture_mean import HueBlendWarning, mean, sort_key, sorted_colors, weighted_mean


class TestWeightedMean:

    def test_single_color_is_identity(self):
        c = LAB(50, 10, -20)
        assert weighted_mean([c], [3.0]) == c

    def test_midpoint(self):
        out = weighted_mean([RGB(0, 0, 0), RGB(1, 1, 1)], [1, 1])
        assert out == RGB(0.5, 0.5, 0.5)

    def test_weights_are_normalised(self):
        a, b = LAB(0, 0, 0), LAB(100, 40, -40)
        assert weighted_mean([a, b], [1, 3]) == weighted_mean([a, b], [0.25, 0.75])
        out = weighted_mean([a, b], [1, 3])
        assert out.l == pytest.approx(75.0)
        assert out.a == pytest.approx(30.0)

    def test_negative_weights_allowed(self):
        out = weighted_mean([XYZ(1, 1, 1), XYZ(2, 2, 2)], [2, -1])
        assert out == XYZ(0, 0, 0)

    def test_result_type_matches_input(self):
        out = weighted_mean([LUV(10, 1, 2), LUV(20, 3, 4)], [1, 1])
        assert type(out) is LUV
        assert out == LUV(15, 2, 3)

    def test_mean(self):
        assert mean([XYZ(0, 0, 0), XYZ(0.3, 0.6, 0.9)]) == XYZ(0.15, 0.3, 0.45)

    def test_empty(self):
        with pytest.raises(ValueError, match="at least one"):
            weighted_mean([], [])

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="Length mismatch"):
            weighted_mean([RGB(), RGB()], [1.0])

    def test_zero_sum(self):
        with pytest.raises(ValueError, match="sum to zero"):
            weighted_mean([RGB(), RGB(1, 1, 1)], [1.0, -1.0])

    def test_mixed_types(self):
        with pytest.raises(TypeError, match="Mixed color types"):
            weighted_mean([RGB(), LAB()], [1.0, 1.0])

    def test_non_colors(self):
        with pytest.raises(TypeError):
            weighted_mean([(0.0, 0.0, 0.0)], [1.0])


class TestHueBlending:
    """Hue is averaged linearly; hue-bearing spaces warn about it."""

    def test_linear_hue(self):
        with pytest.warns(HueBlendWarning):
            out = weighted_mean([HSV(350, 1, 1), HSV(10, 1, 1)], [1, 1])
        assert out.h == pytest.approx(180.0)

    @pytest.mark.parametrize("space", [HSV, HLS, LCHab])
    def test_warns_for_hue_spaces(self, space):
        with pytest.warns(HueBlendWarning, match=space.__name__):
            mean([space(10, 0.5, 0.5), space(20, 0.5, 0.5)])

    def test_no_warning_for_cartesian_spaces(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            mean([LAB(10, 0, 0), LAB(20, 0, 0)])

    def test_no_warning_for_single_color(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert mean([HSV(200, 0.5, 0.5)]) == HSV(200, 0.5, 0.5)


class TestOrdering:

    def test_sort_key_is_rgb_projection(self):
        assert sort_key(RGB(0.1, 0.2, 0.3)) == (0.1, 0.2, 0.3)
        c = LAB(60, 20, 30)
        assert sort_key(c) == convert(RGB, c).components()

    def test_lexicographic(self):
        assert RGB(0.1, 0.9, 0.9) < RGB(0.2, 0.0, 0.0)
        assert RGB(0.5, 0.1, 0.0) < RGB(0.5, 0.2, 0.0)
        assert RGB(1, 0, 0) > RGB(0, 1, 1)
        assert RGB(0.3, 0.3, 0.3) <= RGB(0.3, 0.3, 0.3)
        assert RGB(0.3, 0.3, 0.3) >= RGB(0.3, 0.3, 0.3)

    def test_across_types(self):
        assert HSV(0, 1, 1) > RGB(0.5, 0.5, 0.5)
        assert HSV(240, 1, 1) < RGB(0.5, 0.5, 0.5)

    def test_comparison_with_non_color(self):
        with pytest.raises(TypeError):
            RGB() < (0.0, 0.0, 0.0)

    def test_sorted(self):
        colors = [RGB(1, 0, 0), RGB(0, 0, 1), RGB(0, 1, 0)]
        assert sorted(colors) == [RGB(0, 0, 1), RGB(0, 1, 0), RGB(1, 0, 0)]

    def test_sorted_colors_mixed(self):
        red, green, blue = HSV(0, 1, 1), HLS(120, 0.5, 1), RGB(0, 0, 1)
        assert sorted_colors([red, green, blue]) == [blue, green, red]
        assert sorted_colors([red, green, blue], reverse=True) == [red, green, blue]
