"""Tests for sRGB companding, gamut correction and the strict-IEEE switch."""
import numpy as np
import pytest

from tincture_colors import RGB
from tincture_gamut import (
    SRGB_DECODE_THRESHOLD,
    SRGB_ENCODE_THRESHOLD,
    clamp_unit,
    gamut_correct,
    in_gamut,
    is_strict_ieee,
    lerp,
    set_strict_ieee,
    srgb_compand,
    srgb_decompand,
)


class TestSrgbCurves:
    """sRGB companding (OETF) and decompanding (EOTF)."""

    def test_endpoints(self):
        assert srgb_compand(0.0) == 0.0
        assert srgb_decompand(0.0) == 0.0
        assert srgb_compand(1.0) == pytest.approx(1.0, abs=1e-12)
        assert srgb_decompand(1.0) == pytest.approx(1.0, abs=1e-12)

    def test_linear_segment(self):
        """Below the breakpoint both curves are a pure scale by 12.92."""
        v = 0.002
        assert srgb_compand(v) == pytest.approx(12.92 * v, rel=1e-12)
        assert srgb_decompand(0.03) == pytest.approx(0.03 / 12.92, rel=1e-12)

    def test_power_segment(self):
        v = 0.5
        expected = ((v + 0.055) / 1.055) ** 2.4
        assert srgb_decompand(v) == pytest.approx(expected, rel=1e-9)

    def test_breakpoints_are_continuous(self):
        below = srgb_compand(SRGB_ENCODE_THRESHOLD)
        above = srgb_compand(SRGB_ENCODE_THRESHOLD + 1e-12)
        assert below == pytest.approx(above, abs=1e-5)
        assert below == pytest.approx(SRGB_DECODE_THRESHOLD, abs=1e-5)

    def test_inverse(self):
        for v in np.linspace(0.0, 1.0, 101):
            assert srgb_compand(srgb_decompand(v)) == pytest.approx(v, abs=1e-10)

    def test_accepts_ints(self):
        assert srgb_decompand(1) == pytest.approx(1.0)

    def test_negative_values_propagate(self):
        """Out-of-range inputs pass through the linear segment, no NaN."""
        assert srgb_compand(-0.5) == pytest.approx(-6.46)
        assert not np.isnan(srgb_decompand(-0.5))


class TestStrictIEEE:

    def test_toggle(self):
        assert is_strict_ieee() is False
        set_strict_ieee(True)
        assert is_strict_ieee() is True
        set_strict_ieee(False)
        assert is_strict_ieee() is False

    def test_strict_matches_fast(self):
        values = np.linspace(-0.1, 1.1, 37)
        fast = [srgb_compand(v) for v in values]
        set_strict_ieee(True)
        strict = [srgb_compand(v) for v in values]
        assert np.allclose(fast, strict, atol=1e-12)


class TestLerp:

    def test_interior(self):
        assert lerp(0.5, 0.0, 10.0) == 5.0
        assert lerp(0.25, 100.0, 200.0) == 125.0

    def test_fraction_is_clamped(self):
        assert lerp(-1.0, 0.0, 255.0) == 0.0
        assert lerp(2.0, 0.0, 255.0) == 255.0

    def test_clamp_unit(self):
        assert clamp_unit(-0.2) == 0.0
        assert clamp_unit(0.3) == 0.3
        assert clamp_unit(1.7) == 1.0


class TestGamutCorrect:

    def test_clamps_each_channel(self):
        assert gamut_correct(RGB(-0.1, 0.5, 1.2)) == RGB(0.0, 0.5, 1.0)

    def test_returns_new_value(self):
        c = RGB(0.1, 0.2, 0.3)
        out = gamut_correct(c)
        assert out == c
        assert out is not c

    def test_in_gamut(self):
        assert in_gamut(RGB(0.0, 0.5, 1.0))
        assert not in_gamut(RGB(0.0, 0.5, 1.01))
        assert in_gamut(RGB(-1e-9, 0.5, 1.0), tol=1e-6)
