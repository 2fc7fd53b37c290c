# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry across eight color spaces
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Hex, CSS and JSON rendering of colors.
"""

from __future__ import annotations

import json
import math
from typing import Optional

from tincture_colors import RGB, Color
from tincture_colorengine import convert
from tincture_gamut import lerp

__all__ = [
    "to_hex",
    "cssfmt",
    "to_json",
]


def _channel_byte(v: float) -> int:
    # Round half up; lerp already clamps into [0, 255].
    return int(math.floor(lerp(v, 0.0, 255.0) + 0.5))


def to_hex(c: Color) -> str:
    """Uppercase ``#RRGGBB`` of the color's RGB projection."""
    rgb = c if isinstance(c, RGB) else convert(RGB, c)
    return "#{:02X}{:02X}{:02X}".format(
        _channel_byte(rgb.r), _channel_byte(rgb.g), _channel_byte(rgb.b)
    )


def cssfmt(c: Optional[Color]) -> str:
    """CSS value: the hex string, or ``none`` for an absent color."""
    if c is None:
        return "none"
    return to_hex(c)


def to_json(c: Optional[Color]) -> str:
    """The CSS value as a JSON string literal, e.g. ``"#FF0000"``."""
    return json.dumps(cssfmt(c))
