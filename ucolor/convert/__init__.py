# Copyright (c) 2026 UColor
# SPDX-License-Identifier: MIT

"""
Conversions between color spaces (RGB ↔ HSL) and string formats
(hex, rgb()/rgba()).
"""

from ucolor.convert.colorspace import (
    hsl_to_rgb,
    hsl_to_rgb_batch,
    rgb_to_hsl,
    rgb_to_hsl_batch,
    round_half_up,
)
from ucolor.convert.formats import (
    ParseConfig,
    format_hex,
    format_rgba,
    parse_hex,
    parse_rgba,
)

__all__ = [
    # Color spaces
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsl_batch",
    "hsl_to_rgb_batch",
    "round_half_up",
    # String formats
    "ParseConfig",
    "parse_hex",
    "format_hex",
    "parse_rgba",
    "format_rgba",
]
