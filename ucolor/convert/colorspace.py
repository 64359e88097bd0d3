# Copyright (c) 2026 UColor
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion pair: RGB [0,255] ↔ HSL (H in degrees [0,360), S and L in [0,1])

Scalar routines work on one color. The *_batch variants apply the identical arithmetic
element-wise to NumPy arrays of shape (..., 3); for the same inputs they
produce the same floats and the same rounded integers as the scalar path.

Rounding is half-up (0.5 -> 1, 2.5 -> 3), not Python's
round-half-to-even.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from ucolor.schema.color import HSLColor


# =============================================================================
# Rounding
# =============================================================================


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity."""
    return int(math.floor(value + 0.5))


def round_half_up_batch(values: NDArray[np.float64]) -> NDArray[np.int64]:
    """Vectorized round_half_up."""
    return np.floor(np.asarray(values, dtype=np.float64) + 0.5).astype(np.int64)


def round_decimals(value: float, decimals: int) -> float:
    """Round half-up to a fixed number of decimal places."""
    scale = 10 ** decimals
    return round_half_up(value * scale) / scale


# =============================================================================
# RGB → HSL
# =============================================================================


def rgb_to_hsl(r: int, g: int, b: int) -> HSLColor:
    """
    Convert 8-bit RGB channels to HSL.

    The hue segment is chosen by the first channel (red, green, blue) that
    equals the maximum. In the red segment a +6 offset keeps the hue
    non-negative when green < blue.

    Args:
        r, g, b: Channel values [0, 255]

    Returns:
        HSLColor with h in degrees [0, 360), s and l in [0, 1].
        Achromatic inputs (r == g == b) yield h = s = 0.
    """
    r_n = r / 255
    g_n = g / 255
    b_n = b / 255
    mx = max(r_n, g_n, b_n)
    mn = min(r_n, g_n, b_n)
    l = (mx + mn) / 2

    if mx == mn:
        return HSLColor(h=0.0, s=0.0, l=l)

    d = mx - mn
    s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)

    if mx == r_n:
        h = (g_n - b_n) / d + (6 if g_n < b_n else 0)
    elif mx == g_n:
        h = (b_n - r_n) / d + 2
    else:
        h = (r_n - g_n) / d + 4

    return HSLColor(h=h * 60, s=s, l=l)


def rgb_to_hsl_batch(rgb: NDArray) -> NDArray[np.float64]:
    """
    Convert RGB values [0,255] to HSL.

    Args:
        rgb: Array of shape (..., 3) with RGB values [0, 255]

    Returns:
        Array of shape (..., 3) with (H, S, L); H in degrees
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255

    r = rgb[..., 0]
    g = rgb[..., 1]
    b = rgb[..., 2]

    mx = np.maximum(np.maximum(r, g), b)
    mn = np.minimum(np.minimum(r, g), b)
    l = (mx + mn) / 2
    d = mx - mn

    chromatic = mx != mn
    safe_d = np.where(chromatic, d, 1.0)

    # Denominators are zero only for achromatic pixels, which are masked out
    denom = np.where(l > 0.5, 2 - mx - mn, mx + mn)
    s = np.where(chromatic, d / np.where(chromatic, denom, 1.0), 0.0)

    h_red = (g - b) / safe_d + np.where(g < b, 6.0, 0.0)
    h_green = (b - r) / safe_d + 2
    h_blue = (r - g) / safe_d + 4
    h = np.where(mx == r, h_red, np.where(mx == g, h_green, h_blue))
    h = np.where(chromatic, h * 60, 0.0)

    return np.stack([h, s, l], axis=-1)


# =============================================================================
# HSL → RGB
# =============================================================================


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    """Map a fractional hue offset through the 4-region channel ramp."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    Convert HSL to 8-bit RGB channels.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation [0, 1]
        l: Lightness [0, 1]

    Returns:
        Tuple (r, g, b), each rounded half-up to an integer [0, 255]
    """
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h / 360 + 1 / 3)
        g = _hue_to_rgb(p, q, h / 360)
        b = _hue_to_rgb(p, q, h / 360 - 1 / 3)

    return round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255)


def _hue_to_rgb_batch(
    p: NDArray[np.float64],
    q: NDArray[np.float64],
    t: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Vectorized _hue_to_rgb."""
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q, p + (q - p) * (2 / 3 - t) * 6],
        default=p,
    )


def hsl_to_rgb_batch(hsl: NDArray) -> NDArray[np.int64]:
    """
    Convert HSL to RGB values [0,255].

    Args:
        hsl: Array of shape (..., 3) with (H, S, L); H in degrees

    Returns:
        Array of shape (..., 3) with integer RGB values
    """
    hsl = np.asarray(hsl, dtype=np.float64)

    h = hsl[..., 0]
    s = hsl[..., 1]
    l = hsl[..., 2]

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q
    hk = h / 360

    rgb = np.stack([
        _hue_to_rgb_batch(p, q, hk + 1 / 3),
        _hue_to_rgb_batch(p, q, hk),
        _hue_to_rgb_batch(p, q, hk - 1 / 3),
    ], axis=-1)

    # Achromatic: all channels equal lightness
    rgb = np.where((s == 0)[..., np.newaxis], l[..., np.newaxis], rgb)

    return round_half_up_batch(rgb * 255)
