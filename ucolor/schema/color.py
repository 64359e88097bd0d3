# Copyright (c) 2026 UColor
# SPDX-License-Identifier: MIT

"""
Color value types.

Design principles:
- Immutable: All types are frozen dataclasses
- Fail fast: Channel ranges are checked at construction
- Pure: Every derivation returns a new Color
- Serializable: JSON-ready dict form

RGBA channels:
- r, g, b: integers 0-255
- a: opacity 0.0 (transparent) to 1.0 (opaque), default 1.0

HSL is only an intermediate for hue rotation; it is never stored on a Color.
"""

from __future__ import annotations

import json
import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ucolor.errors import ColorParseError, InvalidChannelError

if TYPE_CHECKING:
    import numpy as np

    from ucolor.convert.formats import ParseConfig


def _is_channel(value: object) -> bool:
    return (
        isinstance(value, numbers.Integral)
        and not isinstance(value, bool)
        and 0 <= value <= 255
    )


def _is_alpha(value: object) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and 0.0 <= value <= 1.0
    )


# =============================================================================
# HSL
# =============================================================================


@dataclass(frozen=True, slots=True)
class HSLColor:
    """
    A color in HSL (Hue, Saturation, Lightness).

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation (0.0 = gray, 1.0 = fully saturated)
        l: Lightness (0.0 = black, 0.5 = pure hue, 1.0 = white)
    """
    h: float
    s: float
    l: float

    def __post_init__(self) -> None:
        """Validate component ranges."""
        if not 0.0 <= self.h < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.h}")
        if not 0.0 <= self.s <= 1.0:
            raise ValueError(f"Saturation must be 0-1, got {self.s}")
        if not 0.0 <= self.l <= 1.0:
            raise ValueError(f"Lightness must be 0-1, got {self.l}")

    @property
    def is_achromatic(self) -> bool:
        """True for grays (no saturation)."""
        return self.s == 0

    def rotate(self, degrees: float) -> HSLColor:
        """Return this color with its hue rotated, modulo 360."""
        h = (self.h + degrees) % 360
        # Float modulo of a tiny negative sum rounds up to exactly 360
        if h >= 360:
            h = 0.0
        return HSLColor(h=h, s=self.s, l=self.l)


# =============================================================================
# RGBA
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    A single RGBA color.

    Two colors with the same channels are equal and hash alike.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
        a: Alpha / opacity (0.0-1.0), default 1.0

    Raises:
        InvalidChannelError: r, g, b are not integers in 0-255, or a is not
            a real number in 0-1.

    Usage:
        c = Color.from_hex("#ff340031")
        c.to_rgba()           # 'rgba(255, 52, 0, 0.192)'
        c.get_contrast_color()
        c.get_palette()       # (c, +120°, +240°)
    """
    r: int
    g: int
    b: int
    a: float = 1.0

    def __post_init__(self) -> None:
        """Validate channel values and store them as plain int/float."""
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not _is_channel(value):
                raise InvalidChannelError(
                    f"Channel {name} must be an integer 0-255, got {value!r}"
                )
            object.__setattr__(self, name, int(value))
        if not _is_alpha(self.a):
            raise InvalidChannelError(f"Alpha must be 0-1, got {self.a!r}")
        object.__setattr__(self, "a", float(self.a))

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def random(
        cls,
        a: Optional[float] = None,
        *,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> Color:
        """
        Generate a random color.

        Args:
            a: Alpha to use as-is. If None, a random alpha with three
               decimals (0.000-1.000) is drawn.
            seed: Seed for a fresh generator (ignored when rng is given)
            rng: NumPy generator to draw from
        """
        import numpy as np
        from ucolor.convert.colorspace import round_half_up

        gen = rng if rng is not None else np.random.default_rng(seed)
        r, g, b = (int(v) for v in gen.integers(0, 256, size=3))
        if a is None:
            a = round_half_up(float(gen.random()) * 1000) / 1000
        return cls(r, g, b, a)

    @classmethod
    def from_hex(cls, hex_string: str, config: Optional[ParseConfig] = None) -> Color:
        """Create from "#RRGGBB" or "#RRGGBBAA"."""
        from ucolor.convert.formats import parse_hex
        return cls(*parse_hex(hex_string, config))

    @classmethod
    def from_rgba(cls, rgba_string: str, config: Optional[ParseConfig] = None) -> Color:
        """
        Create from "rgb(r,g,b)", "rgba(r,g,b,a)" or "rgb(r,g,b,a)".

        An explicit alpha of 0 is read as "no alpha" and yields a = 1,
        unless config.honor_zero_alpha is set.
        """
        from ucolor.convert.formats import parse_rgba
        return cls(*parse_rgba(rgba_string, config))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> Color:
        """Create from HSL components (h in degrees, s and l in 0-1)."""
        from ucolor.convert.colorspace import hsl_to_rgb
        hsl = HSLColor(h=h, s=s, l=l)
        return cls(*hsl_to_rgb(hsl.h, hsl.s, hsl.l), a)

    # -------------------------------------------------------------------------
    # Formatters
    # -------------------------------------------------------------------------

    @property
    def rgb(self) -> tuple[int, int, int]:
        """The (r, g, b) channels without alpha."""
        return self.r, self.g, self.b

    def to_hex(self) -> str:
        """
        Hex string, lowercase.

        Returns "#rrggbb" for opaque colors, "#rrggbbaa" otherwise.
        """
        from ucolor.convert.formats import format_hex
        return format_hex(self.r, self.g, self.b, self.a)

    def to_rgba(self) -> str:
        """String "rgba(r, g, b, a)", always with the alpha field."""
        from ucolor.convert.formats import format_rgba
        return format_rgba(self.r, self.g, self.b, self.a)

    def to_hsl(self) -> HSLColor:
        """Convert the RGB channels to HSL (alpha is not carried)."""
        from ucolor.convert.colorspace import rgb_to_hsl
        return rgb_to_hsl(self.r, self.g, self.b)

    # -------------------------------------------------------------------------
    # Derivations
    # -------------------------------------------------------------------------

    def to_grayscale(self) -> Color:
        """Luma-weighted gray (0.299 R + 0.587 G + 0.114 B), same alpha."""
        from ucolor.derive.luma import to_grayscale
        return to_grayscale(self)

    def get_contrast_color(self) -> Color:
        """
        Complementary color: hue rotated by 180°, same alpha.

        This is the opposite hue, not a guarantee of a readable contrast
        ratio.
        """
        from ucolor.derive.harmony import contrast_color
        return contrast_color(self)

    def get_palette(self) -> tuple[Color, Color, Color]:
        """Triadic palette: (self, hue + 120°, hue + 240°), same alpha."""
        from ucolor.derive.harmony import triadic_palette
        return triadic_palette(self)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """
        Deserialize from dictionary. Missing alpha defaults to 1.0.

        Raises:
            ColorParseError: data is not a dict or lacks a channel
            InvalidChannelError: a channel value is out of range
        """
        if not isinstance(data, dict):
            raise ColorParseError(f"Expected a dict of channels, got {type(data).__name__}")
        try:
            return cls(r=data["r"], g=data["g"], b=data["b"], a=data.get("a", 1.0))
        except KeyError as e:
            raise ColorParseError(f"Missing channel {e.args[0]!r} in {data!r}") from e

    @classmethod
    def from_json(cls, json_str: str) -> Color:
        """
        Deserialize from JSON string.

        Raises:
            ColorParseError: invalid JSON, or JSON that is not a channel object
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ColorParseError(f"Invalid JSON color: {e}") from e
        return cls.from_dict(data)
