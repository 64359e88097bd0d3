# Copyright (c) 2026 UColor
# SPDX-License-Identifier: MIT

"""
Color value types.

All types in this module are immutable (frozen dataclasses).
"""

from ucolor.schema.color import Color, HSLColor

__all__ = [
    "Color",
    "HSLColor",
]
