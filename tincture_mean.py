# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry across eight color spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Ordering & Weighted Mean
========================
An arbitrary total order over colors (lexicographic on the RGB projection)
and a field-wise weighted mean over a homogeneous sequence of colors.

The mean blends every field linearly in the colors' own coordinate system.
That is meaningful for approximately perceptually linear spaces (LAB, LUV,
XYZ). For hue-bearing spaces (HSV, HLS, LCHab, LCHuv) the hue is averaged
as a plain number with no circular treatment, so 350 and 10 average to 180.
This is kept as is and flagged with ``HueBlendWarning``.
"""

from __future__ import annotations

import warnings
from typing import List, Sequence, TypeVar

import numpy as np

from tincture_colors import RGB, Color, ColorTriple
from tincture_colorengine import convert

__all__ = [
    "HueBlendWarning",
    "sort_key",
    "sorted_colors",
    "weighted_mean",
    "mean",
]

T = TypeVar("T", bound=Color)


class HueBlendWarning(UserWarning):
    """A weighted mean blended a hue field linearly (no wraparound)."""


def sort_key(c: Color) -> ColorTriple:
    """
    Ordering key of any color: its RGB projection as (r, g, b).

    Non-perceptual; intended for sorting and deduplication only.
    """
    rgb = c if isinstance(c, RGB) else convert(RGB, c)
    return rgb.r, rgb.g, rgb.b


def sorted_colors(colors: Sequence[Color], reverse: bool = False) -> List[Color]:
    """Sorts mixed-type colors by ``sort_key``."""
    return sorted(colors, key=sort_key, reverse=reverse)


def weighted_mean(colors: Sequence[T], weights: Sequence[float]) -> T:
    """
    Weighted mean of some number of colors within the same space.

    Args:
        colors: Non-empty sequence of colors, all of the same type T.
        weights: Weights of the same length as ``colors``. They are
            normalised by their sum, which must be nonzero.

    Returns:
        A weighted mean color of type T.

    Raises:
        ValueError: Empty input, length mismatch, or zero weight sum.
        TypeError: Mixed color types (convert to a common type first).
    """
    if len(colors) == 0:
        raise ValueError("weighted_mean requires at least one color.")
    if len(colors) != len(weights):
        raise ValueError(
            f"Length mismatch: {len(colors)} colors vs {len(weights)} weights."
        )

    space = type(colors[0])
    if not isinstance(colors[0], Color):
        raise TypeError(f"Expected Color values, got {space.__name__}")
    for c in colors[1:]:
        if type(c) is not space:
            raise TypeError(
                f"Mixed color types: {space.__name__} and {type(c).__name__}. "
                "Convert to a common type first."
            )

    w = np.asarray(weights, dtype=np.float64)
    total = float(np.sum(w))
    if total == 0.0:
        raise ValueError("Weights sum to zero.")

    if space.hue_index is not None and len(colors) > 1:
        warnings.warn(
            f"Averaging {space.__name__} blends hue linearly without wraparound.",
            HueBlendWarning,
            stacklevel=2,
        )

    comps = np.array([c.components() for c in colors], dtype=np.float64)
    mu = np.dot(w / total, comps)
    return space.from_components(mu.tolist())


def mean(colors: Sequence[T]) -> T:
    """Unweighted mean, see ``weighted_mean``."""
    return weighted_mean(colors, [1.0] * len(colors))
