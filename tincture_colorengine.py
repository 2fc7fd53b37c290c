# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry across eight color spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Conversion Engine
=================
Exact, round-trippable transforms between RGB, HSV, HLS, XYZ, LAB, LCHab,
LUV and LCHuv, plus linear chromatic adaptation between white points.

Only seven closed-form *direct* edges exist:

    HSV --+                  +-- LAB -- LCHab
          +-- RGB -- XYZ ----+
    HLS --+                  +-- LUV -- LCHuv

The edges form a tree rooted at XYZ, so the shortest route between any two
spaces is the path through their lowest common ancestor. All 64 routes are
resolved once at import into a static table; ``convert`` simply walks the
stored route. The white point (explicit, by name, or the D65 default) is
passed to every XYZ<->LAB and XYZ<->LUV edge the route crosses.

Numerical policy:
    - Achromatic inputs (max == min channel, chroma below CHROMA_EPSILON,
      L == 0, or a zero u'v' denominator) resolve to hue 0 / saturation 0 /
      black instead of dividing by zero.
    - Every produced hue is wrapped into [0, 360), never clamped. This holds
      for identity conversions too, which wrap the hue field of their input.
    - RGB is gamut-corrected exactly once, on the XYZ -> RGB edge, after
      companding. RGB -> XYZ never clamps.

References:
    - CIE 15:2004 "Colorimetry"
    - IEC 61966-2-1:1999 (sRGB Standard)
    - Lindbloom, B. "Useful Color Equations" (brucelindbloom.com)
"""

from __future__ import annotations

import functools
import logging
from types import MappingProxyType
from typing import Callable, Final, Mapping, Tuple, TypeVar

import numpy as np
from numba import njit, float64

from tincture_colors import (
    ALL_COLOR_TYPES,
    Color,
    ColorTriple,
    HLS,
    HSV,
    LAB,
    LCHab,
    LCHuv,
    LUV,
    RGB,
    XYZ,
)
from tincture_gamut import clamp_unit, is_strict_ieee, srgb_compand, srgb_decompand
from tincture_whitepoints import WP_D65, WhitePointLike, white_point as resolve_white_point

__all__ = [
    # --- Constants ---
    "LAB_EPSILON",
    "LAB_KAPPA",
    "CHROMA_EPSILON",
    "DEG2RAD",
    "RAD2DEG",

    # --- Matrices ---
    "M_SRGB_TO_XYZ",
    "M_XYZ_TO_SRGB",
    "CAT_MATRICES",

    # --- Functions ---
    "convert",
    "conversion_route",
    "wrap_hue",
    "xyz_to_uv_prime",
    "chromatic_adaptation",
    "to_rgb",
    "to_hsv",
    "to_hls",
    "to_xyz",
    "to_lab",
    "to_lchab",
    "to_luv",
    "to_lchuv",

    # --- Classes ---
    "ColorSpaceEngine",
    "ChromaticAdaptation",
]

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Color)

# Raw edge signature: (components, white point) -> components
EdgeFunc = Callable[[ColorTriple, XYZ], ColorTriple]


# --- Constants & Matrices ---

# sRGB primaries, D65 reference white (IEC 61966-2-1).
_M_SRGB_TO_XYZ_PUBLISHED = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041]
], dtype=np.float64)
# Rows rescaled so RGB(1, 1, 1) lands exactly on WP_D65; grays then reach
# LAB/LUV with zero chroma instead of a ~1e-5 residual.
M_SRGB_TO_XYZ: Final[np.ndarray] = _M_SRGB_TO_XYZ_PUBLISHED * (
    np.array(WP_D65.components(), dtype=np.float64)
    / _M_SRGB_TO_XYZ_PUBLISHED.sum(axis=1)
)[:, np.newaxis]
# Exact numerical inverse rather than the rounded published matrix, so that
# RGB -> XYZ -> RGB closes to machine precision.
M_XYZ_TO_SRGB: Final[np.ndarray] = np.linalg.inv(M_SRGB_TO_XYZ)

# --- Exact Rational Math Constants ---
# CIE 1976: epsilon = (6/29)^3 = 216/24389, kappa = (29/3)^3 = 24389/27.
_LAB_DELTA: Final[float] = 6.0 / 29.0
LAB_EPSILON: Final[float] = 216.0 / 24389.0  # ~0.008856
LAB_KAPPA: Final[float]   = 24389.0 / 27.0   # ~903.296

DEG2RAD: Final[float] = np.pi / 180.0
RAD2DEG: Final[float] = 180.0 / np.pi

# Denominators below this are treated as zero (achromatic / black).
_EPS: Final[float] = 1e-12
# Chroma below this has no meaningful hue; float noise on grays is ~1e-13.
CHROMA_EPSILON: Final[float] = 1e-9


# =============================================================================
# 1. LOW-LEVEL MATH KERNELS (Numba)
# =============================================================================

@njit(float64(float64), cache=True)
def _wrap_hue_kernel(h: float) -> float:
    """Wraps an angle in degrees into [0, 360)."""
    h = h % 360.0
    # Tiny negative inputs round up to exactly 360.0
    if h >= 360.0:
        h -= 360.0
    return h

@njit(cache=True, fastmath=True)
def _sector_hue(r: float, g: float, b: float, c_max: float, delta: float) -> float:
    """Hexcone hue in degrees for a chromatic RGB triple (delta > 0)."""
    if c_max == r:
        h = (g - b) / delta
    elif c_max == g:
        h = 2.0 + (b - r) / delta
    else:
        h = 4.0 + (r - g) / delta
    return _wrap_hue_kernel(60.0 * h)

@njit(cache=True, fastmath=True)
def _rgb_to_hsv_kernel(r: float, g: float, b: float) -> Tuple[float, float, float]:
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min
    if delta < 1e-12:
        return 0.0, 0.0, c_max
    s = delta / c_max if c_max != 0.0 else 0.0
    return _sector_hue(r, g, b, c_max, delta), s, c_max

@njit(cache=True, fastmath=True)
def _hsv_to_rgb_kernel(h: float, s: float, v: float) -> Tuple[float, float, float]:
    hp = _wrap_hue_kernel(h) / 60.0
    fl = np.floor(hp)
    i = int(fl) % 6
    f = hp - fl

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    if i == 0:
        return v, t, p
    elif i == 1:
        return q, v, p
    elif i == 2:
        return p, v, t
    elif i == 3:
        return p, q, v
    elif i == 4:
        return t, p, v
    return v, p, q

@njit(cache=True, fastmath=True)
def _rgb_to_hls_kernel(r: float, g: float, b: float) -> Tuple[float, float, float]:
    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min
    l = (c_max + c_min) / 2.0
    if delta < 1e-12:
        return 0.0, l, 0.0

    if l <= 0.5:
        denom = c_max + c_min
    else:
        denom = 2.0 - c_max - c_min
    s = delta / denom if abs(denom) > 1e-12 else 0.0
    return _sector_hue(r, g, b, c_max, delta), l, s

@njit(cache=True, fastmath=True)
def _hls_channel(u: float, v: float, hue: float) -> float:
    hue = _wrap_hue_kernel(hue)
    if hue < 60.0:
        return u + (v - u) * hue / 60.0
    elif hue < 180.0:
        return v
    elif hue < 240.0:
        return u + (v - u) * (240.0 - hue) / 60.0
    return u

@njit(cache=True, fastmath=True)
def _hls_to_rgb_kernel(h: float, l: float, s: float) -> Tuple[float, float, float]:
    if s == 0.0:
        return l, l, l
    if l <= 0.5:
        v = l * (1.0 + s)
    else:
        v = l + s - l * s
    u = 2.0 * l - v
    return (_hls_channel(u, v, h + 120.0),
            _hls_channel(u, v, h),
            _hls_channel(u, v, h - 120.0))

@njit(cache=True, fastmath=True)
def _lab_to_lch_kernel(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """Cartesian (a, b) -> polar (C, h). Also used for (u, v)."""
    c = np.hypot(a, b)
    if c < CHROMA_EPSILON:
        return l, c, 0.0
    return l, c, _wrap_hue_kernel(np.arctan2(b, a) * RAD2DEG)

@njit(cache=True, fastmath=True)
def _lch_to_lab_kernel(l: float, c: float, h: float) -> Tuple[float, float, float]:
    """Polar (C, h in degrees) -> Cartesian (a, b). Also used for (u, v)."""
    h_rad = h * DEG2RAD
    return l, c * np.cos(h_rad), c * np.sin(h_rad)

@njit(cache=True, fastmath=True)
def _xyz_to_uv_prime_kernel(x: float, y: float, z: float) -> Tuple[float, float]:
    """
    CIE 1976 u', v' chromaticity.

        u' = 4X / (X + 15Y + 3Z)
        v' = 9Y / (X + 15Y + 3Z)

    Black (zero denominator) returns (0, 0).
    """
    d = x + 15.0 * y + 3.0 * z
    if abs(d) < 1e-12:
        return 0.0, 0.0
    return 4.0 * x / d, 9.0 * y / d

# --- CIELAB transfer function, fast and strict variants ---

@njit(float64(float64), cache=True, fastmath=True)
def _lab_f_fast(t: float) -> float:
    """Cube root above epsilon, linear segment below."""
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return (LAB_KAPPA * t + 16.0) / 116.0

@njit(float64(float64), cache=True, fastmath=True)
def _lab_f_inv_fast(t: float) -> float:
    """
    Inverse of ``_lab_f``.

    Uses multiplication form (116*t - 16)/k instead of (t - 16/116)/(k/116)
    to minimise floating point division error near the delta threshold.
    """
    if t > _LAB_DELTA:
        return t * t * t
    return (116.0 * t - 16.0) / LAB_KAPPA

@njit(float64(float64), cache=True, fastmath=False)
def _lab_f_strict(t: float) -> float:
    """Lab f(t), strict IEEE 754 variant."""
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return (LAB_KAPPA * t + 16.0) / 116.0

@njit(float64(float64), cache=True, fastmath=False)
def _lab_f_inv_strict(t: float) -> float:
    """Lab f_inv(t), strict IEEE 754 variant."""
    if t > _LAB_DELTA:
        return t * t * t
    return (116.0 * t - 16.0) / LAB_KAPPA

def _lab_f(t: float) -> float:
    if is_strict_ieee():
        return _lab_f_strict(t)
    return _lab_f_fast(t)

def _lab_f_inv(t: float) -> float:
    if is_strict_ieee():
        return _lab_f_inv_strict(t)
    return _lab_f_inv_fast(t)


# --- Public scalar helpers ---

def wrap_hue(h: float) -> float:
    """Wraps a hue angle in degrees into [0, 360), e.g. 370 -> 10, -10 -> 350."""
    return _wrap_hue_kernel(float(h))

def xyz_to_uv_prime(c: XYZ) -> Tuple[float, float]:
    """CIE 1976 (u', v') chromaticity of an XYZ value; black gives (0, 0)."""
    return _xyz_to_uv_prime_kernel(c.x, c.y, c.z)


# =============================================================================
# 2. COLOR SPACE ENGINE
# =============================================================================

class ColorSpaceEngine:
    """Static utility class holding the seven direct conversion edges.

    Architecture Note:
        Each edge has an internal ``_raw`` form that maps a plain component
        tuple (plus white point) to a component tuple; routes composed by
        ``convert`` chain these without building intermediate color objects.
        The public typed methods wrap a single edge for direct use.
    """

    # =====================================================================
    #  Internal _raw edges  (tuple in, tuple out)
    # =====================================================================

    @staticmethod
    def _rgb_to_xyz_raw(rgb: ColorTriple, wp: XYZ) -> ColorTriple:
        """Raw sRGB -> XYZ. No clamping."""
        linear = np.array([srgb_decompand(v) for v in rgb], dtype=np.float64)
        return tuple(np.dot(M_SRGB_TO_XYZ, linear).tolist())

    @staticmethod
    def _xyz_to_rgb_raw(xyz: ColorTriple, wp: XYZ) -> ColorTriple:
        """Raw XYZ -> sRGB, gamut-corrected after companding."""
        linear = np.dot(M_XYZ_TO_SRGB, np.asarray(xyz, dtype=np.float64))
        return tuple(clamp_unit(srgb_compand(v)) for v in linear.tolist())

    @staticmethod
    def _rgb_to_hsv_raw(rgb: ColorTriple, wp: XYZ) -> ColorTriple:
        return _rgb_to_hsv_kernel(*rgb)

    @staticmethod
    def _hsv_to_rgb_raw(hsv: ColorTriple, wp: XYZ) -> ColorTriple:
        return _hsv_to_rgb_kernel(*hsv)

    @staticmethod
    def _rgb_to_hls_raw(rgb: ColorTriple, wp: XYZ) -> ColorTriple:
        return _rgb_to_hls_kernel(*rgb)

    @staticmethod
    def _hls_to_rgb_raw(hls: ColorTriple, wp: XYZ) -> ColorTriple:
        return _hls_to_rgb_kernel(*hls)

    @staticmethod
    def _xyz_to_lab_raw(xyz: ColorTriple, wp: XYZ) -> ColorTriple:
        """Raw XYZ -> Lab relative to ``wp``."""
        fx = _lab_f(xyz[0] / wp.x)
        fy = _lab_f(xyz[1] / wp.y)
        fz = _lab_f(xyz[2] / wp.z)
        return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)

    @staticmethod
    def _lab_to_xyz_raw(lab: ColorTriple, wp: XYZ) -> ColorTriple:
        """Raw Lab -> XYZ relative to ``wp``."""
        l, a, b = lab
        fy = (l + 16.0) / 116.0
        fx = a / 500.0 + fy
        fz = fy - b / 200.0
        return _lab_f_inv(fx) * wp.x, _lab_f_inv(fy) * wp.y, _lab_f_inv(fz) * wp.z

    @staticmethod
    def _xyz_to_luv_raw(xyz: ColorTriple, wp: XYZ) -> ColorTriple:
        """Raw XYZ -> Luv relative to ``wp``."""
        x, y, z = xyz
        u_n, v_n = _xyz_to_uv_prime_kernel(wp.x, wp.y, wp.z)

        l = 116.0 * _lab_f(y / wp.y) - 16.0
        if abs(x + 15.0 * y + 3.0 * z) < _EPS:
            # Black: chromaticity undefined, treat as the white's own.
            return l, 0.0, 0.0

        u_p, v_p = _xyz_to_uv_prime_kernel(x, y, z)
        return l, 13.0 * l * (u_p - u_n), 13.0 * l * (v_p - v_n)

    @staticmethod
    def _luv_to_xyz_raw(luv: ColorTriple, wp: XYZ) -> ColorTriple:
        """Raw Luv -> XYZ relative to ``wp``."""
        l, u, v = luv
        if abs(l) < _EPS:
            return 0.0, 0.0, 0.0

        u_n, v_n = _xyz_to_uv_prime_kernel(wp.x, wp.y, wp.z)
        inv_13l = 1.0 / (13.0 * l)
        u_p = u * inv_13l + u_n
        v_p = v * inv_13l + v_n

        y = _lab_f_inv((l + 16.0) / 116.0) * wp.y
        if abs(v_p) < _EPS:
            return 0.0, y, 0.0

        inv_4vp = 1.0 / (4.0 * v_p)
        x = y * 9.0 * u_p * inv_4vp
        z = y * (12.0 - 3.0 * u_p - 20.0 * v_p) * inv_4vp
        return x, y, z

    @staticmethod
    def _lab_to_lch_raw(lab: ColorTriple, wp: XYZ) -> ColorTriple:
        return _lab_to_lch_kernel(*lab)

    @staticmethod
    def _lch_to_lab_raw(lch: ColorTriple, wp: XYZ) -> ColorTriple:
        return _lch_to_lab_kernel(*lch)

    # =====================================================================
    #  Public API  (typed, single edge)
    # =====================================================================

    @staticmethod
    def rgb_to_xyz(c: RGB) -> XYZ:
        """
        Converts sRGB to XYZ (D65 primaries).

        Decompands each channel, then applies the sRGB -> XYZ matrix.
        Out-of-range channels propagate; nothing is clamped.
        """
        return XYZ(*ColorSpaceEngine._rgb_to_xyz_raw(c.components(), resolve_white_point()))

    @staticmethod
    def xyz_to_rgb(c: XYZ) -> RGB:
        """
        Converts XYZ to sRGB.

        Applies the inverse matrix, compands, then clamps every channel into
        [0, 1]. This is the RGB gamut boundary of every conversion chain.
        """
        return RGB(*ColorSpaceEngine._xyz_to_rgb_raw(c.components(), resolve_white_point()))

    @staticmethod
    def rgb_to_hsv(c: RGB) -> HSV:
        """Six-sector hexcone. Achromatic input gives h = s = 0."""
        return HSV(*_rgb_to_hsv_kernel(c.r, c.g, c.b))

    @staticmethod
    def hsv_to_rgb(c: HSV) -> RGB:
        return RGB(*_hsv_to_rgb_kernel(c.h, c.s, c.v))

    @staticmethod
    def rgb_to_hls(c: RGB) -> HLS:
        """Double hexcone. Achromatic input gives h = s = 0."""
        return HLS(*_rgb_to_hls_kernel(c.r, c.g, c.b))

    @staticmethod
    def hls_to_rgb(c: HLS) -> RGB:
        return RGB(*_hls_to_rgb_kernel(c.h, c.l, c.s))

    @staticmethod
    def xyz_to_lab(c: XYZ, illuminant: WhitePointLike = None) -> LAB:
        """
        Converts XYZ to CIELAB (L*a*b*).

        Args:
            c: Input XYZ.
            illuminant: Reference white (XYZ or name, default D65).
        """
        wp = resolve_white_point(illuminant)
        return LAB(*ColorSpaceEngine._xyz_to_lab_raw(c.components(), wp))

    @staticmethod
    def lab_to_xyz(c: LAB, illuminant: WhitePointLike = None) -> XYZ:
        """
        Converts CIELAB to XYZ.

        Args:
            c: Input Lab.
            illuminant: Reference white (XYZ or name, default D65).
        """
        wp = resolve_white_point(illuminant)
        return XYZ(*ColorSpaceEngine._lab_to_xyz_raw(c.components(), wp))

    @staticmethod
    def xyz_to_luv(c: XYZ, illuminant: WhitePointLike = None) -> LUV:
        """
        Converts XYZ to CIELUV.

        Useful for emitted light and white point estimation (u'v').
        """
        wp = resolve_white_point(illuminant)
        return LUV(*ColorSpaceEngine._xyz_to_luv_raw(c.components(), wp))

    @staticmethod
    def luv_to_xyz(c: LUV, illuminant: WhitePointLike = None) -> XYZ:
        """Converts CIELUV to XYZ. L == 0 gives black."""
        wp = resolve_white_point(illuminant)
        return XYZ(*ColorSpaceEngine._luv_to_xyz_raw(c.components(), wp))

    @staticmethod
    def lab_to_lch(c: LAB) -> LCHab:
        """Converts CIELAB to CIELCh(ab). Hue in degrees, [0, 360)."""
        return LCHab(*_lab_to_lch_kernel(c.l, c.a, c.b))

    @staticmethod
    def lch_to_lab(c: LCHab) -> LAB:
        return LAB(*_lch_to_lab_kernel(c.l, c.c, c.h))

    @staticmethod
    def luv_to_lch(c: LUV) -> LCHuv:
        """Converts CIELUV to CIELCh(uv). Hue in degrees, [0, 360)."""
        return LCHuv(*_lab_to_lch_kernel(c.l, c.u, c.v))

    @staticmethod
    def lch_to_luv(c: LCHuv) -> LUV:
        return LUV(*_lch_to_lab_kernel(c.l, c.c, c.h))


# =============================================================================
# 3. CONVERSION GRAPH
# =============================================================================

_EDGES: Final[Mapping[Tuple[type, type], EdgeFunc]] = MappingProxyType({
    (RGB, XYZ):     ColorSpaceEngine._rgb_to_xyz_raw,
    (XYZ, RGB):     ColorSpaceEngine._xyz_to_rgb_raw,
    (RGB, HSV):     ColorSpaceEngine._rgb_to_hsv_raw,
    (HSV, RGB):     ColorSpaceEngine._hsv_to_rgb_raw,
    (RGB, HLS):     ColorSpaceEngine._rgb_to_hls_raw,
    (HLS, RGB):     ColorSpaceEngine._hls_to_rgb_raw,
    (XYZ, LAB):     ColorSpaceEngine._xyz_to_lab_raw,
    (LAB, XYZ):     ColorSpaceEngine._lab_to_xyz_raw,
    (XYZ, LUV):     ColorSpaceEngine._xyz_to_luv_raw,
    (LUV, XYZ):     ColorSpaceEngine._luv_to_xyz_raw,
    (LAB, LCHab):   ColorSpaceEngine._lab_to_lch_raw,
    (LCHab, LAB):   ColorSpaceEngine._lch_to_lab_raw,
    (LUV, LCHuv):   ColorSpaceEngine._lab_to_lch_raw,
    (LCHuv, LUV):   ColorSpaceEngine._lch_to_lab_raw,
})

# Parent of each space in the edge tree rooted at XYZ.
_PARENT: Final[Mapping[type, type]] = MappingProxyType({
    RGB: XYZ,
    HSV: RGB,
    HLS: RGB,
    LAB: XYZ,
    LCHab: LAB,
    LUV: XYZ,
    LCHuv: LUV,
})

def _path_to_root(space: type) -> Tuple[type, ...]:
    path = [space]
    while path[-1] in _PARENT:
        path.append(_PARENT[path[-1]])
    return tuple(path)

def _build_route(src: type, dst: type) -> Tuple[type, ...]:
    """Shortest route src -> dst: up to the lowest common ancestor, then down."""
    up = _path_to_root(src)
    down = _path_to_root(dst)
    for i, node in enumerate(up):
        if node in down:
            j = down.index(node)
            return up[:i + 1] + tuple(reversed(down[:j]))
    raise AssertionError(f"{src.__name__} and {dst.__name__} are not connected")

_ROUTES: Final[Mapping[Tuple[type, type], Tuple[type, ...]]] = MappingProxyType({
    (src, dst): _build_route(src, dst)
    for src in ALL_COLOR_TYPES
    for dst in ALL_COLOR_TYPES
})


def conversion_route(src: type[Color], dst: type[Color]) -> Tuple[type[Color], ...]:
    """
    Returns the fixed sequence of spaces visited when converting src -> dst.

    Example:
        >>> [t.__name__ for t in conversion_route(HSV, LAB)]
        ['HSV', 'RGB', 'XYZ', 'LAB']
    """
    try:
        return _ROUTES[(src, dst)]
    except KeyError:
        raise TypeError(
            f"No conversion route from {getattr(src, '__name__', src)!r} "
            f"to {getattr(dst, '__name__', dst)!r}"
        ) from None


def convert(target: type[T], color: Color, white_point: WhitePointLike = None) -> T:
    """
    Converts ``color`` into the ``target`` color type.

    Total over every ordered pair of the eight types, identity included
    (which returns an equal, new value).

    Args:
        target: One of RGB, HSV, HLS, XYZ, LAB, LCHab, LUV, LCHuv.
        color: The source color.
        white_point: Reference white for the XYZ<->LAB / XYZ<->LUV edges on
            the route: an XYZ, an illuminant name ("D50"), or None for D65.
            Ignored by routes that do not cross those edges.

    Returns:
        A new value of type ``target``.

    Raises:
        TypeError: If ``color`` is not a Color or ``target`` is not one of
            the eight color types.
    """
    if not isinstance(color, Color):
        raise TypeError(f"Expected a Color, got {type(color).__name__}")
    route = conversion_route(type(color), target)
    wp = resolve_white_point(white_point)

    values = color.components()
    for src, dst in zip(route, route[1:]):
        values = _EDGES[(src, dst)](values, wp)

    if target.hue_index is not None:
        # Identity routes run no edge, so the input hue is wrapped here.
        out = list(values)
        out[target.hue_index] = _wrap_hue_kernel(out[target.hue_index])
        values = tuple(out)
    return target(*values)


def to_rgb(c: Color, white_point: WhitePointLike = None) -> RGB:
    return convert(RGB, c, white_point)

def to_hsv(c: Color, white_point: WhitePointLike = None) -> HSV:
    return convert(HSV, c, white_point)

def to_hls(c: Color, white_point: WhitePointLike = None) -> HLS:
    return convert(HLS, c, white_point)

def to_xyz(c: Color, white_point: WhitePointLike = None) -> XYZ:
    return convert(XYZ, c, white_point)

def to_lab(c: Color, white_point: WhitePointLike = None) -> LAB:
    return convert(LAB, c, white_point)

def to_lchab(c: Color, white_point: WhitePointLike = None) -> LCHab:
    return convert(LCHab, c, white_point)

def to_luv(c: Color, white_point: WhitePointLike = None) -> LUV:
    return convert(LUV, c, white_point)

def to_lchuv(c: Color, white_point: WhitePointLike = None) -> LCHuv:
    return convert(LCHuv, c, white_point)


# =============================================================================
# 4. CHROMATIC ADAPTATION
# =============================================================================

# Cone-response ("sharpened") matrices for von Kries style adaptation.
# Column-vector convention: lms = M @ xyz.
CAT_MATRICES: Final[Mapping[str, np.ndarray]] = MappingProxyType({
    # Sharp (Finlayson & Süsstrunk), reported slightly better than Bradford.
    "sharp": np.array([
        [ 1.2694, -0.0988, -0.1706],
        [-0.8364,  1.8006,  0.0357],
        [ 0.0297, -0.0315,  1.0018]
    ], dtype=np.float64),
    "bradford": np.array([
        [ 0.8951000,  0.2664000, -0.1614000],
        [-0.7502000,  1.7135000,  0.0367000],
        [ 0.0389000, -0.0685000,  1.0296000]
    ], dtype=np.float64),
    # Hunt-Pointer-Estevez, normalised to D65.
    "von_kries": np.array([
        [ 0.4002400,  0.7076000, -0.0808100],
        [-0.2263000,  1.1653200,  0.0457000],
        [ 0.0000000,  0.0000000,  0.9182200]
    ], dtype=np.float64),
    "xyz_scaling": np.eye(3, dtype=np.float64),
})

@functools.lru_cache(maxsize=32)
def _get_cached_cat_matrix(src_wp: XYZ, dst_wp: XYZ, method: str) -> np.ndarray:
    """
    Cached worker for the composite adaptation matrix.

    Derivation:
        M_composite = M_inv @ diag(dst_lms / src_lms) @ M
    """
    m = CAT_MATRICES[method]
    src_lms = np.dot(m, np.array(src_wp.components(), dtype=np.float64))
    dst_lms = np.dot(m, np.array(dst_wp.components(), dtype=np.float64))

    # Prevent divide-by-zero for degenerate white points
    src_lms = np.where(np.abs(src_lms) < _EPS, _EPS, src_lms)
    gains = np.diag(dst_lms / src_lms)

    logger.debug("Built %s adaptation matrix %s -> %s", method, src_wp, dst_wp)
    composite = np.linalg.inv(m) @ gains @ m
    composite.setflags(write=False)
    return composite


class ChromaticAdaptation:
    """Handles white point adaptation (linear von Kries family)."""

    @staticmethod
    def matrix(src_white: WhitePointLike, dst_white: WhitePointLike,
               method: str = "sharp") -> np.ndarray:
        """
        Computes the 3x3 adaptation matrix between two white points.

        Args:
            src_white: Source white point (XYZ or name).
            dst_white: Destination white point (XYZ or name).
            method: One of ``CAT_MATRICES`` ("sharp", "bradford",
                "von_kries", "xyz_scaling").

        Returns:
            Read-only 3x3 matrix for column-vector multiplication.
        """
        key = method.lower()
        if key not in CAT_MATRICES:
            raise ValueError(
                f"Unknown adaptation method: {method!r}. "
                f"Known: {', '.join(CAT_MATRICES)}"
            )
        return _get_cached_cat_matrix(resolve_white_point(src_white),
                                      resolve_white_point(dst_white), key)

    @staticmethod
    def adapt(c: XYZ, src_white: WhitePointLike, dst_white: WhitePointLike,
              method: str = "sharp") -> XYZ:
        """
        Remaps a tristimulus value as if lit by the destination white point.

        Args:
            c: Input XYZ.
            src_white: White point ``c`` is relative to.
            dst_white: White point to adapt to.
            method: Cone-response matrix, see ``matrix``.

        Returns:
            Adapted XYZ.
        """
        m = ChromaticAdaptation.matrix(src_white, dst_white, method)
        if resolve_white_point(src_white) == resolve_white_point(dst_white):
            return XYZ(*c.components())
        return XYZ(*np.dot(m, np.array(c.components(), dtype=np.float64)).tolist())


def chromatic_adaptation(c: Color, src_white: WhitePointLike, dst_white: WhitePointLike,
                         method: str = "sharp") -> XYZ:
    """Adapts any color (projected to XYZ first) between white points."""
    xyz = c if isinstance(c, XYZ) else convert(XYZ, c, src_white)
    return ChromaticAdaptation.adapt(xyz, src_white, dst_white, method)
