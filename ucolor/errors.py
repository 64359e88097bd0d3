# Copyright (c) 2026 UColor
# SPDX-License-Identifier: MIT

"""
Exception hierarchy.

All errors derive from ValueError so callers that already guard against
bad values keep working.
"""


class ColorError(ValueError):
    """Base class for all UColor errors."""


class InvalidChannelError(ColorError):
    """A channel value is outside its valid range or of the wrong type."""


class ColorParseError(ColorError):
    """A color string (or serialized dict) could not be parsed."""
