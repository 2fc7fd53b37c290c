"""Tests for white point adaptation."""
import numpy as np
import pytest

from tincture_colorengine import (
    CAT_MATRICES,
    ChromaticAdaptation,
    chromatic_adaptation,
    convert,
)
from tincture_colors import LAB, RGB, XYZ
from tincture_whitepoints import WHITE_POINTS, WP_A, WP_D50, WP_D65

METHODS = sorted(CAT_MATRICES)

# Lindbloom, "Chromatic Adaptation", Bradford D65 -> D50.
BRADFORD_D65_TO_D50 = np.array([
    [ 1.0478112,  0.0228866, -0.0501270],
    [ 0.0295424,  0.9904844, -0.0170491],
    [-0.0092345,  0.0150436,  0.7521316],
])


class TestMatrix:

    def test_bradford_reference(self):
        m = ChromaticAdaptation.matrix(WP_D65, WP_D50, method="bradford")
        np.testing.assert_allclose(m, BRADFORD_D65_TO_D50, atol=1e-4)

    @pytest.mark.parametrize("method", METHODS)
    def test_same_white_is_identity(self, method):
        m = ChromaticAdaptation.matrix("D65", "D65", method)
        np.testing.assert_allclose(m, np.eye(3), atol=1e-12)

    @pytest.mark.parametrize("method", METHODS)
    def test_reverse_is_inverse(self, method):
        fwd = ChromaticAdaptation.matrix("D65", "A", method)
        back = ChromaticAdaptation.matrix("A", "D65", method)
        np.testing.assert_allclose(fwd @ back, np.eye(3), atol=1e-9)

    def test_xyz_scaling_is_diagonal(self):
        m = ChromaticAdaptation.matrix(WP_D65, WP_D50, method="xyz_scaling")
        np.testing.assert_allclose(m, np.diag(np.array(WP_D50.components())
                                              / np.array(WP_D65.components())))

    def test_method_is_case_insensitive(self):
        a = ChromaticAdaptation.matrix("D65", "D50", "Bradford")
        b = ChromaticAdaptation.matrix("D65", "D50", "bradford")
        np.testing.assert_array_equal(a, b)

    def test_read_only(self):
        m = ChromaticAdaptation.matrix("D65", "D50")
        with pytest.raises(ValueError):
            m[0, 0] = 2.0

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown adaptation method"):
            ChromaticAdaptation.matrix("D65", "D50", method="cat16")

    def test_unknown_white_point(self):
        with pytest.raises(KeyError):
            ChromaticAdaptation.matrix("D65", "D99")


class TestAdapt:

    @pytest.mark.parametrize("method", METHODS)
    @pytest.mark.parametrize("dst", sorted(WHITE_POINTS))
    def test_white_maps_to_white(self, method, dst):
        out = ChromaticAdaptation.adapt(WP_D65, "D65", dst, method)
        np.testing.assert_allclose(out.components(), WHITE_POINTS[dst].components(),
                                   atol=1e-9)

    def test_same_white_returns_copy(self):
        c = XYZ(0.2, 0.3, 0.4)
        out = ChromaticAdaptation.adapt(c, WP_D50, "D50")
        assert out == c
        assert out is not c

    def test_default_method_is_sharp(self):
        c = XYZ(0.2, 0.3, 0.4)
        assert ChromaticAdaptation.adapt(c, "D65", "A") == \
            ChromaticAdaptation.adapt(c, "D65", "A", method="sharp")

    def test_wrapper_accepts_any_color(self):
        out = chromatic_adaptation(RGB(1, 1, 1), "D65", "D50")
        np.testing.assert_allclose(out.components(), WP_D50.components(), atol=1e-6)

    def test_wrapper_with_lab_input(self):
        """A LAB value is projected to XYZ against the source white first."""
        lab = LAB(100, 0, 0)
        out = chromatic_adaptation(lab, "D50", "A", method="bradford")
        np.testing.assert_allclose(out.components(), WP_A.components(), atol=1e-9)

    def test_adapted_white_is_neutral_in_lab(self):
        adapted = chromatic_adaptation(RGB(1, 1, 1), "D65", "D50", method="bradford")
        lab = convert(LAB, adapted, "D50")
        assert lab.l == pytest.approx(100.0, abs=1e-4)
        assert lab.a == pytest.approx(0.0, abs=1e-3)
        assert lab.b == pytest.approx(0.0, abs=1e-3)
