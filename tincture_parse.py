# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry across eight color spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Color literal parsing.

Accepted forms (whitespace anywhere is ignored, matching is case-insensitive):

    #RGB, 0xRGB            each digit d becomes 17 * d, i.e. #F00 == #FF0000
    #RRGGBB, 0xRRGGBB
    rgb(r, g, b)           integers 0-255
    <name>                 X11 color name, e.g. "red", "gray50"

Forms are tried in that order; each pattern must match the whole string.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Pattern, Tuple, Union

from tincture_colors import RGB, Color
from tincture_names import X11_COLORS

__all__ = [
    "UnknownColorError",
    "color",
    "colour",
    "try_color",
]

logger = logging.getLogger(__name__)

_PAT_HEX3: Pattern[str] = re.compile(r"(?:#|0x)([0-9a-f])([0-9a-f])([0-9a-f])")
_PAT_HEX6: Pattern[str] = re.compile(r"(?:#|0x)([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})")
_PAT_RGB: Pattern[str]  = re.compile(r"rgb\((\d+),(\d+),(\d+)\)")


class UnknownColorError(ValueError):
    """Raised when a string is not a recognised color literal."""

    def __init__(self, desc: str) -> None:
        super().__init__(f"Unknown color: {desc!r}")
        self.desc = desc


def _from_bytes(r: int, g: int, b: int) -> RGB:
    return RGB(r / 255.0, g / 255.0, b / 255.0)

def _parse_hex3(s: str) -> Optional[RGB]:
    m = _PAT_HEX3.fullmatch(s)
    if m is None:
        return None
    return _from_bytes(*(17 * int(d, 16) for d in m.groups()))

def _parse_hex6(s: str) -> Optional[RGB]:
    m = _PAT_HEX6.fullmatch(s)
    if m is None:
        return None
    return _from_bytes(*(int(d, 16) for d in m.groups()))

def _parse_rgb_func(s: str) -> Optional[RGB]:
    m = _PAT_RGB.fullmatch(s)
    if m is None:
        return None
    channels = tuple(int(d) for d in m.groups())
    if any(v > 255 for v in channels):
        return None
    return _from_bytes(*channels)

def _parse_name(s: str) -> Optional[RGB]:
    rgb = X11_COLORS.get(s)
    if rgb is None:
        return None
    return _from_bytes(*rgb)

_ATTEMPTS: Tuple[Tuple[str, Callable[[str], Optional[RGB]]], ...] = (
    ("hex3", _parse_hex3),
    ("hex6", _parse_hex6),
    ("rgb()", _parse_rgb_func),
    ("x11 name", _parse_name),
)


def try_color(desc: Union[str, Color]) -> Optional[Color]:
    """Like ``color`` but returns None for an unrecognised string."""
    if isinstance(desc, Color):
        return desc
    if not isinstance(desc, str):
        raise TypeError(f"Expected a color string, got {type(desc).__name__}")
    key = "".join(desc.split()).lower()
    for label, attempt in _ATTEMPTS:
        result = attempt(key)
        if result is not None:
            logger.debug("Parsed %r as %s -> %s", desc, label, result)
            return result
    return None


def color(desc: Union[str, Color]) -> Color:
    """
    Parses a color literal into RGB; a Color passes through unchanged.

    Args:
        desc: ``#RGB``, ``#RRGGBB``, ``0xRRGGBB``, ``rgb(r,g,b)`` or an X11
            color name.

    Returns:
        RGB with channels in [0, 1] (or ``desc`` itself if already a Color).

    Raises:
        UnknownColorError: If the string matches none of the forms.
    """
    result = try_color(desc)
    if result is None:
        raise UnknownColorError(desc)  # type: ignore[arg-type]
    return result


colour = color
