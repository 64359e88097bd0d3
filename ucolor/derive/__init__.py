# Copyright (c) 2026 UColor
# SPDX-License-Identifier: MIT

"""
Derived colors.

Grayscale by luma weighting, and hue-rotation harmonies (complementary,
triadic, and friends) computed through HSL.
"""

from ucolor.derive.harmony import (
    HarmonyScheme,
    contrast_color,
    harmony,
    rotate_hues,
    triadic_palette,
)
from ucolor.derive.luma import luma, to_grayscale

__all__ = [
    "HarmonyScheme",
    "harmony",
    "rotate_hues",
    "contrast_color",
    "triadic_palette",
    "luma",
    "to_grayscale",
]
