# Copyright (c) 2026 UColor
# SPDX-License-Identifier: MIT

"""Luma weighting (ITU-R BT.601) and grayscale derivation."""

from __future__ import annotations

from ucolor.convert.colorspace import round_half_up
from ucolor.schema import Color

# BT.601 luma weights
LUMA_R = 0.299
LUMA_G = 0.587
LUMA_B = 0.114


def luma(color: Color) -> float:
    """Weighted brightness in channel units [0, 255]."""
    return (color.r * LUMA_R) + (color.g * LUMA_G) + (color.b * LUMA_B)


def to_grayscale(color: Color) -> Color:
    """Gray with the color's rounded luma on all channels; alpha unchanged."""
    gray = round_half_up(luma(color))
    return Color(gray, gray, gray, color.a)
