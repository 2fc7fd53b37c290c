# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry across eight color spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Gamut & Companding Utilities
============================
sRGB transfer curves (IEC 61966-2-1), gamut correction and the clamped
linear interpolation used for integer channel output.

The transfer curves are compiled scalar Numba kernels in two flavours:

- fast (``fastmath=True``, default): relaxed IEEE semantics.
- strict (``fastmath=False``): correct inf/NaN propagation, no FP
  reassociation. Select with ``set_strict_ieee(True)``.

Gamut correction is applied exactly once per conversion chain, at the step
that produces the final RGB value. Linear intermediates are never clamped.
"""

from __future__ import annotations

from typing import Final

from numba import njit, float64

from tincture_colors import RGB

__all__ = [
    # --- Configuration ---
    "set_strict_ieee",
    "is_strict_ieee",

    # --- Transfer curves ---
    "SRGB_DECODE_THRESHOLD",
    "SRGB_ENCODE_THRESHOLD",
    "srgb_compand",
    "srgb_decompand",

    # --- Gamut ---
    "lerp",
    "clamp_unit",
    "gamut_correct",
    "in_gamut",
]

# Breakpoints of the piecewise sRGB curve.
SRGB_DECODE_THRESHOLD: Final[float] = 0.04045
SRGB_ENCODE_THRESHOLD: Final[float] = 0.0031308


# --- Runtime Configuration ---
# When True, the transfer-curve dispatchers use the fastmath=False kernels.
# Toggle at runtime via:
#     import tincture_gamut as tg
#     tg.set_strict_ieee(True)   # enable strict mode
#     tg.set_strict_ieee(False)  # back to fast mode (default)
_STRICT_IEEE: bool = False

def set_strict_ieee(enabled: bool = True) -> None:
    """
    Toggle between fast (default) and strict IEEE 754 Numba kernels.

    Affects the sRGB companding curves here and the CIELAB transfer
    function in ``tincture_colorengine``.

    Args:
        enabled: If True, use strict IEEE mode.
    """
    global _STRICT_IEEE
    _STRICT_IEEE = bool(enabled)

def is_strict_ieee() -> bool:
    return _STRICT_IEEE


# =============================================================================
# 1. TRANSFER CURVE KERNELS
# =============================================================================

@njit(float64(float64), cache=True, fastmath=True)
def _srgb_compand_fast(v: float) -> float:
    """Linear light -> sRGB (OETF)."""
    # IEC 61966-2-1 defines the slope as exactly 12.92
    if v <= 0.0031308:
        return 12.92 * v
    return 1.055 * (v ** (1.0 / 2.4)) - 0.055

@njit(float64(float64), cache=True, fastmath=True)
def _srgb_decompand_fast(v: float) -> float:
    """sRGB -> linear light (EOTF)."""
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4

@njit(float64(float64), cache=True, fastmath=False)
def _srgb_compand_strict(v: float) -> float:
    """sRGB OETF, strict IEEE 754 variant."""
    if v <= 0.0031308:
        return 12.92 * v
    return 1.055 * (v ** (1.0 / 2.4)) - 0.055

@njit(float64(float64), cache=True, fastmath=False)
def _srgb_decompand_strict(v: float) -> float:
    """sRGB EOTF, strict IEEE 754 variant."""
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


# --- Kernel dispatchers ---

def srgb_compand(v: float) -> float:
    """
    Encodes a linear-light value with the sRGB curve.

        v <= 0.0031308 ? 12.92 v : 1.055 v^(1/2.4) - 0.055
    """
    if _STRICT_IEEE:
        return _srgb_compand_strict(float(v))
    return _srgb_compand_fast(float(v))

def srgb_decompand(v: float) -> float:
    """
    Decodes an sRGB value to linear light; exact inverse of ``srgb_compand``.

        v <= 0.04045 ? v / 12.92 : ((v + 0.055) / 1.055)^2.4
    """
    if _STRICT_IEEE:
        return _srgb_decompand_strict(float(v))
    return _srgb_decompand_fast(float(v))


# =============================================================================
# 2. GAMUT HELPERS
# =============================================================================

def clamp_unit(v: float) -> float:
    """Clamps a scalar into [0, 1]."""
    return min(1.0, max(0.0, v))

def lerp(x: float, a: float, b: float) -> float:
    """
    Linear interpolation in [a, b] where x is in [0, 1], or coerced to be.

    Args:
        x: Interpolation fraction; clamped into [0, 1] before blending.
        a: Value at x = 0.
        b: Value at x = 1.
    """
    return a + (b - a) * clamp_unit(x)

def gamut_correct(c: RGB) -> RGB:
    """Returns a new RGB with each channel independently clamped into [0, 1]."""
    return RGB(clamp_unit(c.r), clamp_unit(c.g), clamp_unit(c.b))

def in_gamut(c: RGB, tol: float = 0.0) -> bool:
    """True if every channel lies within [-tol, 1 + tol]."""
    return all(-tol <= v <= 1.0 + tol for v in (c.r, c.g, c.b))
