# Copyright (c) 2026 UColor
# SPDX-License-Identifier: MIT

"""
String formats: HEX (#rrggbb / #rrggbbaa) and CSS-style rgb()/rgba().

Parsers return plain channel tuples (r, g, b, a); building and validating
a Color is left to the Color factories.

Known quirk (kept on purpose): in rgb()/rgba() strings an explicit alpha
of 0 is treated the same as a missing alpha field and becomes 1. Pass
ParseConfig(honor_zero_alpha=True) to keep a literal 0.
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from ucolor.convert.colorspace import round_decimals, round_half_up
from ucolor.errors import ColorParseError

logger = logging.getLogger(__name__)

Number = Union[int, float]


@dataclass(frozen=True)
class ParseConfig:
    """Configuration for color string parsing."""

    # Keep an explicit rgba(..., 0) alpha instead of defaulting it to 1
    honor_zero_alpha: bool = False

    # Reject hex strings without the leading '#'
    require_hash: bool = True


# =============================================================================
# Grammars
# =============================================================================

_HEX_RE = re.compile(r"(#?)([0-9a-fA-F]{6})([0-9a-fA-F]{2})?")
_RGBA_RE = re.compile(r"rgba?\(([^()]*)\)", re.IGNORECASE)
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# Decimal places kept when alpha is decoded from an 8-bit hex channel
ALPHA_DECIMALS = 3


def _fail(message: str, text: str) -> ColorParseError:
    logger.debug("Parse failure for %r: %s", text, message)
    return ColorParseError(f"{message}: {text!r}")


# =============================================================================
# HEX
# =============================================================================


def parse_hex(
    hex_string: str,
    config: Optional[ParseConfig] = None,
) -> tuple[int, int, int, float]:
    """
    Parse a hex color string.

    Args:
        hex_string: "#RRGGBB" or "#RRGGBBAA" (case-insensitive). Surrounding
            whitespace is ignored.
        config: Parse settings (uses defaults if None)

    Returns:
        Tuple (r, g, b, a). Alpha is AA / 255 rounded to 3 decimals, or 1.0
        when the 6-digit form is used.

    Raises:
        ColorParseError: wrong length, non-hex digits, or missing '#'
    """
    cfg = config or ParseConfig()

    if not isinstance(hex_string, str):
        raise ColorParseError(f"Hex color must be a string, got {type(hex_string).__name__}")

    m = _HEX_RE.fullmatch(hex_string.strip())
    if not m:
        raise _fail("Expected #RRGGBB or #RRGGBBAA", hex_string)
    if cfg.require_hash and not m.group(1):
        raise _fail("Hex color must start with '#'", hex_string)

    digits = m.group(2)
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)

    a = 1.0
    if m.group(3) is not None:
        a = round_decimals(int(m.group(3), 16) / 255, ALPHA_DECIMALS)

    logger.debug("Parsed hex %r -> (%d, %d, %d, %s)", hex_string, r, g, b, a)
    return r, g, b, a


def format_hex(r: int, g: int, b: int, a: float = 1.0) -> str:
    """
    Format channels as lowercase hex.

    Returns "#rrggbb" when a == 1, otherwise "#rrggbbaa" with the alpha
    byte computed as round(a * 255).
    """
    rgb = f"#{r:02x}{g:02x}{b:02x}"
    if a == 1:
        return rgb
    return f"{rgb}{round_half_up(a * 255):02x}"


# =============================================================================
# rgb() / rgba()
# =============================================================================


def _parse_number(field: str, text: str) -> Number:
    """Parse one numeric field; integral values come back as int."""
    field = field.strip()
    if not _NUMBER_RE.fullmatch(field):
        raise _fail(f"Invalid numeric field {field!r}", text)
    value = float(field)
    if value.is_integer():
        return int(value)
    return value


def parse_rgba(
    rgba_string: str,
    config: Optional[ParseConfig] = None,
) -> tuple[Number, Number, Number, float]:
    """
    Parse an rgb()/rgba() color string.

    Accepted shapes:
        rgb(r, g, b)
        rgba(r, g, b, a)
        rgb(r, g, b, a)   (non-standard, tolerated)

    A fourth field that parses to a non-zero number is used as alpha;
    otherwise alpha defaults to 1. With config.honor_zero_alpha an explicit
    0 is kept.

    Args:
        rgba_string: The color string. Outer whitespace is trimmed; fields
            may carry surrounding whitespace.
        config: Parse settings (uses defaults if None)

    Returns:
        Tuple (r, g, b, a). Channel fields are returned as int when they
        are integral; range checks are left to the Color constructor.

    Raises:
        ColorParseError: missing rgb(/rgba( prefix or closing ')', wrong
            field count, or non-numeric fields
    """
    cfg = config or ParseConfig()

    if not isinstance(rgba_string, str):
        raise ColorParseError(f"RGBA color must be a string, got {type(rgba_string).__name__}")

    m = _RGBA_RE.fullmatch(rgba_string.strip())
    if not m:
        raise _fail("Expected rgb(r,g,b) or rgba(r,g,b,a)", rgba_string)

    fields = m.group(1).split(",")
    if len(fields) not in (3, 4):
        raise _fail(f"Expected 3 or 4 fields, got {len(fields)}", rgba_string)

    r, g, b = (_parse_number(f, rgba_string) for f in fields[:3])

    a = 1.0
    if len(fields) == 4:
        alpha = float(_parse_number(fields[3], rgba_string))
        if alpha != 0 or cfg.honor_zero_alpha:
            a = alpha
        else:
            logger.debug("Alpha 0 in %r treated as absent, using 1", rgba_string)

    logger.debug("Parsed rgba %r -> (%s, %s, %s, %s)", rgba_string, r, g, b, a)
    return r, g, b, a


def format_number(value: Number) -> str:
    """
    Format a number in its natural representation.

    Integral values print without a decimal point (1, not 1.0); other
    values use the shortest digits that round-trip (0.5). Magnitudes below
    1e-6 or from 1e21 up use an unpadded exponent (1e-7, 1e+21); everything
    in between prints positionally (0.00005).
    """
    if isinstance(value, numbers.Integral):
        return str(int(value))
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    magnitude = abs(value)
    if value.is_integer() and magnitude < 1e21:
        return str(int(value))
    if magnitude < 1e-6 or magnitude >= 1e21:
        mantissa, exponent = repr(value).split("e")
        exp = int(exponent)
        return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"
    return format(Decimal(repr(value)), "f")


def format_rgba(r: Number, g: Number, b: Number, a: Number = 1.0) -> str:
    """Format channels as "rgba(r, g, b, a)", always with four fields."""
    return (
        f"rgba({format_number(r)}, {format_number(g)}, "
        f"{format_number(b)}, {format_number(a)})"
    )
