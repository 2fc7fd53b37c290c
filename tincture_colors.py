# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry across eight color spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Color Value Types
=================
Immutable three-component records for every supported color space.

Each type is a frozen, slotted dataclass. Fields are coerced to ``float`` on
construction but never range-checked: chained conversions legitimately pass
through values outside the nominal ranges (e.g. LAB a/b beyond +-150), and
clamping only ever happens at the RGB boundary of the conversion engine.

Nominal ranges:

    ======  =======================================  =====================
    Type    Fields                                   Notes
    ======  =======================================  =====================
    RGB     r, g, b in [0, 1]                        sRGB, gamma-companded
    HSV     h in [0, 360), s, v in [0, 1]            hue wraps mod 360
    HLS     h in [0, 360), l, s in [0, 1]
    XYZ     x, y, z >= 0                             CIE 1931, linear
    LAB     l in [0, 100], a, b unbounded            CIELAB
    LCHab   l in [0, 100], c >= 0, h in [0, 360)     polar LAB
    LUV     l in [0, 100], u, v unbounded            CIELUV
    LCHuv   l in [0, 100], c >= 0, h in [0, 360)     polar LUV
    ======  =======================================  =====================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Iterable, Optional, Tuple, TypeVar

__all__ = [
    "Color",
    "Colour",
    "RGB",
    "HSV",
    "HLS",
    "XYZ",
    "LAB",
    "LCHab",
    "LUV",
    "LCHuv",
    "ALL_COLOR_TYPES",
    "HUE_COLOR_TYPES",
    "ColorTriple",
    "is_color",
]

ColorTriple = Tuple[float, float, float]
C = TypeVar("C", bound="Color")


# =============================================================================
# 1. BASE CLASS
# =============================================================================

class Color:
    """
    Common capabilities of every color value.

    Subclasses declare ``fields`` (the three field names in storage order) and
    ``hue_index`` (position of the hue field, or None for Cartesian spaces).
    Comparison operators implement an arbitrary total order through the RGB
    projection; it exists for sorting and deduplication, not similarity.
    """
    __slots__ = ()

    fields: ClassVar[Tuple[str, str, str]]
    hue_index: ClassVar[Optional[int]] = None

    def components(self) -> ColorTriple:
        """Returns the three fields as a plain tuple, in ``fields`` order."""
        return tuple(getattr(self, name) for name in self.fields)  # type: ignore[return-value]

    @classmethod
    def from_components(cls: type[C], values: Iterable[float]) -> C:
        """Builds a value of this type from a length-3 iterable."""
        vals = tuple(values)
        if len(vals) != 3:
            raise ValueError(f"{cls.__name__} expects 3 components, got {len(vals)}")
        return cls(*vals)

    @property
    def has_hue(self) -> bool:
        return self.hue_index is not None

    def convert(self, target: type[C], white_point: Any = None) -> C:
        """Converts this color to ``target`` (see ``tincture_colorengine.convert``)."""
        from tincture_colorengine import convert
        return convert(target, self, white_point)

    def hex(self) -> str:
        """Uppercase ``#RRGGBB`` of the RGB projection."""
        from tincture_format import to_hex
        return to_hex(self)

    # --- Arbitrary ordering via RGB projection ---

    def _sort_key(self) -> ColorTriple:
        from tincture_mean import sort_key
        return sort_key(self)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def _coerce_fields(self) -> None:
        # Frozen dataclass: bypass __setattr__ to normalise numeric types once.
        for name in self.fields:
            object.__setattr__(self, name, float(getattr(self, name)))


# For our non-american pals.
Colour = Color


# =============================================================================
# 2. CONCRETE COLOR TYPES
# =============================================================================

@dataclass(slots=True, frozen=True)
class RGB(Color):
    """sRGB, gamma-companded. Channels nominally in [0, 1]."""
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    fields: ClassVar[Tuple[str, str, str]] = ("r", "g", "b")

    def __post_init__(self) -> None:
        self._coerce_fields()


@dataclass(slots=True, frozen=True)
class HSV(Color):
    """Hue-Saturation-Value."""
    h: float = 0.0
    s: float = 0.0
    v: float = 0.0

    fields: ClassVar[Tuple[str, str, str]] = ("h", "s", "v")
    hue_index: ClassVar[Optional[int]] = 0

    def __post_init__(self) -> None:
        self._coerce_fields()


@dataclass(slots=True, frozen=True)
class HLS(Color):
    """Hue-Lightness-Saturation."""
    h: float = 0.0
    l: float = 0.0
    s: float = 0.0

    fields: ClassVar[Tuple[str, str, str]] = ("h", "l", "s")
    hue_index: ClassVar[Optional[int]] = 0

    def __post_init__(self) -> None:
        self._coerce_fields()


@dataclass(slots=True, frozen=True)
class XYZ(Color):
    """CIE 1931 tristimulus values (linear, Y = 1 for reference white)."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    fields: ClassVar[Tuple[str, str, str]] = ("x", "y", "z")

    def __post_init__(self) -> None:
        self._coerce_fields()


@dataclass(slots=True, frozen=True)
class LAB(Color):
    """CIE 1976 L*a*b*."""
    l: float = 0.0
    a: float = 0.0
    b: float = 0.0

    fields: ClassVar[Tuple[str, str, str]] = ("l", "a", "b")

    def __post_init__(self) -> None:
        self._coerce_fields()


@dataclass(slots=True, frozen=True)
class LCHab(Color):
    """Lightness-Chroma-Hue, polar form of CIELAB."""
    l: float = 0.0
    c: float = 0.0
    h: float = 0.0

    fields: ClassVar[Tuple[str, str, str]] = ("l", "c", "h")
    hue_index: ClassVar[Optional[int]] = 2

    def __post_init__(self) -> None:
        self._coerce_fields()


@dataclass(slots=True, frozen=True)
class LUV(Color):
    """CIE 1976 L*u*v*."""
    l: float = 0.0
    u: float = 0.0
    v: float = 0.0

    fields: ClassVar[Tuple[str, str, str]] = ("l", "u", "v")

    def __post_init__(self) -> None:
        self._coerce_fields()


@dataclass(slots=True, frozen=True)
class LCHuv(Color):
    """Lightness-Chroma-Hue, polar form of CIELUV."""
    l: float = 0.0
    c: float = 0.0
    h: float = 0.0

    fields: ClassVar[Tuple[str, str, str]] = ("l", "c", "h")
    hue_index: ClassVar[Optional[int]] = 2

    def __post_init__(self) -> None:
        self._coerce_fields()


ALL_COLOR_TYPES: Tuple[type[Color], ...] = (RGB, HSV, HLS, XYZ, LAB, LCHab, LUV, LCHuv)
HUE_COLOR_TYPES: Tuple[type[Color], ...] = tuple(t for t in ALL_COLOR_TYPES if t.hue_index is not None)


def is_color(obj: Any) -> bool:
    return isinstance(obj, Color)


