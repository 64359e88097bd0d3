# Copyright (c) 2026 UColor
# SPDX-License-Identifier: MIT

"""
UColor -- RGBA color value type with HSL-based color theory helpers.

Parses and formats hex and rgb()/rgba() strings, and derives grayscale,
complementary and triadic colors by rotating hue in HSL.

Quick start::

    from ucolor import Color

    c = Color.from_hex("#ff340031")
    c.to_rgba()             # 'rgba(255, 52, 0, 0.192)'
    c.get_contrast_color()  # Complementary hue
    c.get_palette()         # Triadic palette
"""

from __future__ import annotations

__version__ = "1.0.0"

from ucolor.errors import ColorError, ColorParseError, InvalidChannelError
from ucolor.schema import Color, HSLColor
from ucolor.convert import (
    ParseConfig,
    hsl_to_rgb,
    hsl_to_rgb_batch,
    rgb_to_hsl,
    rgb_to_hsl_batch,
)
from ucolor.derive import HarmonyScheme, harmony, rotate_hues

__all__ = [
    # Core API
    "Color",
    "HSLColor",
    "ParseConfig",
    # Derivations
    "HarmonyScheme",
    "harmony",
    "rotate_hues",
    # Conversions
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsl_batch",
    "hsl_to_rgb_batch",
    # Errors
    "ColorError",
    "ColorParseError",
    "InvalidChannelError",
    # Version
    "__version__",
]
