# Copyright (c) 2026 UColor
# SPDX-License-Identifier: MIT

"""
Hue-rotation color harmonies.

Every harmony keeps saturation, lightness and alpha of the base color and
only moves the hue around the HSL wheel:

    COMPLEMENTARY        +180
    TRIADIC              +120, +240
    ANALOGOUS            +30, +330
    SPLIT_COMPLEMENTARY  +150, +210
    TETRADIC             +90, +180, +270

The base color is converted to HSL once; all rotated hues are converted
back in a single vectorized pass.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence

import numpy as np

from ucolor.convert.colorspace import hsl_to_rgb_batch, rgb_to_hsl
from ucolor.schema import Color


class HarmonyScheme(Enum):
    """Supported harmony schemes, valued by their hue offsets in degrees."""
    COMPLEMENTARY = (180.0,)
    TRIADIC = (120.0, 240.0)
    ANALOGOUS = (30.0, 330.0)
    SPLIT_COMPLEMENTARY = (150.0, 210.0)
    TETRADIC = (90.0, 180.0, 270.0)

    @property
    def offsets(self) -> tuple[float, ...]:
        """Hue offsets (degrees) of the derived colors."""
        return self.value


def rotate_hues(color: Color, degrees: Sequence[float]) -> tuple[Color, ...]:
    """
    Rotate the hue of a color by each of the given offsets.

    Args:
        color: Base color
        degrees: Hue offsets in degrees; each result hue is (h + offset) % 360

    Returns:
        One Color per offset, in order, sharing the base color's alpha.
        Achromatic colors come back unchanged (there is no hue to move).
    """
    if len(degrees) == 0:
        return ()

    hsl = rgb_to_hsl(color.r, color.g, color.b)
    hues = (hsl.h + np.asarray(degrees, dtype=np.float64)) % 360

    rows = np.empty((len(hues), 3), dtype=np.float64)
    rows[:, 0] = hues
    rows[:, 1] = hsl.s
    rows[:, 2] = hsl.l

    rgb = hsl_to_rgb_batch(rows)
    return tuple(Color(int(r), int(g), int(b), color.a) for r, g, b in rgb)


def contrast_color(color: Color) -> Color:
    """Complementary color (hue + 180°)."""
    return rotate_hues(color, HarmonyScheme.COMPLEMENTARY.offsets)[0]


def triadic_palette(color: Color) -> tuple[Color, Color, Color]:
    """Triadic scheme: (color, hue + 120°, hue + 240°). The first item is color itself."""
    second, third = rotate_hues(color, HarmonyScheme.TRIADIC.offsets)
    return color, second, third


def harmony(color: Color, scheme: HarmonyScheme) -> tuple[Color, ...]:
    """
    Build a harmony for a color.

    Returns:
        The base color followed by one color per offset of the scheme.
    """
    return (color, *rotate_hues(color, scheme.offsets))
