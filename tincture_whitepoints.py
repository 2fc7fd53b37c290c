# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry across eight color spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Reference white points (CIE standard illuminants, 2 degree observer, Y = 1).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping, Union

from tincture_colors import XYZ

__all__ = [
    "WP_A", "WP_B", "WP_C",
    "WP_D50", "WP_D55", "WP_D65", "WP_D75",
    "WP_E",
    "WP_F2", "WP_F7", "WP_F11",
    "WP_DEFAULT",
    "WHITE_POINTS",
    "WhitePointLike",
    "white_point",
]


# A: incandescent / tungsten (approx 2856K)
WP_A: Final[XYZ]   = XYZ(1.09850, 1.00000, 0.35585)
# B: direct sunlight at noon (obsolete)
WP_B: Final[XYZ]   = XYZ(0.99072, 1.00000, 0.85223)
# C: average daylight (obsolete, replaced by D65)
WP_C: Final[XYZ]   = XYZ(0.98074, 1.00000, 1.18232)
# D50: horizon daylight, ICC profile connection space
WP_D50: Final[XYZ] = XYZ(0.96422, 1.00000, 0.82521)
WP_D55: Final[XYZ] = XYZ(0.95682, 1.00000, 0.92149)
# D65: average daylight, sRGB reference white
WP_D65: Final[XYZ] = XYZ(0.95047, 1.00000, 1.08883)
WP_D75: Final[XYZ] = XYZ(0.94972, 1.00000, 1.22638)
# E: equal energy
WP_E: Final[XYZ]   = XYZ(1.00000, 1.00000, 1.00000)
# F-series: fluorescent
WP_F2: Final[XYZ]  = XYZ(0.99186, 1.00000, 0.67393)
WP_F7: Final[XYZ]  = XYZ(0.95041, 1.00000, 1.08747)
WP_F11: Final[XYZ] = XYZ(1.00962, 1.00000, 0.64350)

WP_DEFAULT: Final[XYZ] = WP_D65

WHITE_POINTS: Final[Mapping[str, XYZ]] = MappingProxyType({
    "A": WP_A,
    "B": WP_B,
    "C": WP_C,
    "D50": WP_D50,
    "D55": WP_D55,
    "D65": WP_D65,
    "D75": WP_D75,
    "E": WP_E,
    "F2": WP_F2,
    "F7": WP_F7,
    "F11": WP_F11,
})

WhitePointLike = Union[XYZ, str, None]


def white_point(wp: WhitePointLike = None) -> XYZ:
    """
    Resolves a white point argument to its XYZ value.

    Args:
        wp: An XYZ value (returned as is), an illuminant name such as
            ``"D50"`` (case-insensitive), or None for ``WP_DEFAULT``.

    Returns:
        The reference white as XYZ.
    """
    if wp is None:
        return WP_DEFAULT
    if isinstance(wp, XYZ):
        return wp
    if isinstance(wp, str):
        key = wp.strip().upper()
        try:
            return WHITE_POINTS[key]
        except KeyError:
            raise KeyError(
                f"Unknown white point: {wp!r}. Known: {', '.join(WHITE_POINTS)}"
            ) from None
    raise TypeError(f"White point must be XYZ, str or None, got {type(wp).__name__}")
