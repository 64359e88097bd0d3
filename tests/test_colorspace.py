# Copyright (c) 2026 UColor
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (RGB ↔ HSL)."""

import numpy as np
import pytest

from ucolor.convert.colorspace import (
    hsl_to_rgb,
    hsl_to_rgb_batch,
    rgb_to_hsl,
    rgb_to_hsl_batch,
    round_decimals,
    round_half_up,
    round_half_up_batch,
)


def _sample_rgb(n=500, seed=42):
    return np.random.default_rng(seed).integers(0, 256, size=(n, 3))


class TestRounding:
    """Rounding must be half-up, not banker's rounding."""

    def test_half_rounds_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(127.5) == 128

    def test_below_half_rounds_down(self):
        assert round_half_up(2.49) == 2

    def test_negative_half(self):
        assert round_half_up(-0.5) == 0
        assert round_half_up(-1.5) == -1

    def test_batch_matches_scalar(self):
        values = np.array([0.5, 1.5, 2.5, 2.49, -0.5, 254.999])
        expected = [round_half_up(v) for v in values]
        assert round_half_up_batch(values).tolist() == expected

    def test_round_decimals(self):
        assert round_decimals(49 / 255, 3) == 0.192
        assert round_decimals(0.0005, 3) == 0.001


class TestRGBToHSL:

    def test_red(self):
        hsl = rgb_to_hsl(255, 0, 0)
        assert (hsl.h, hsl.s, hsl.l) == (0.0, 1.0, 0.5)

    def test_green(self):
        hsl = rgb_to_hsl(0, 255, 0)
        assert hsl.h == pytest.approx(120.0)
        assert hsl.s == pytest.approx(1.0)

    def test_blue(self):
        assert rgb_to_hsl(0, 0, 255).h == pytest.approx(240.0)

    def test_red_segment_wraps_when_green_below_blue(self):
        """Magenta sits in the red segment with g < b; hue must stay positive."""
        assert rgb_to_hsl(255, 0, 255).h == pytest.approx(300.0)

    def test_orange(self):
        hsl = rgb_to_hsl(255, 52, 0)
        assert hsl.h == pytest.approx(52 / 255 * 60)
        assert hsl.s == pytest.approx(1.0)
        assert hsl.l == pytest.approx(0.5)

    def test_light_color_saturation_branch(self):
        """l > 0.5 uses d / (2 - max - min)."""
        hsl = rgb_to_hsl(255, 200, 200)
        mx, mn = 1.0, 200 / 255
        assert hsl.l > 0.5
        assert hsl.s == pytest.approx((mx - mn) / (2 - mx - mn))

    def test_white_and_black(self):
        white = rgb_to_hsl(255, 255, 255)
        black = rgb_to_hsl(0, 0, 0)
        assert (white.h, white.s, white.l) == (0.0, 0.0, 1.0)
        assert (black.h, black.s, black.l) == (0.0, 0.0, 0.0)

    def test_hue_range(self):
        for r, g, b in _sample_rgb():
            hsl = rgb_to_hsl(int(r), int(g), int(b))
            assert 0.0 <= hsl.h < 360.0
            assert 0.0 <= hsl.s <= 1.0
            assert 0.0 <= hsl.l <= 1.0


class TestHSLToRGB:

    def test_primaries(self):
        assert hsl_to_rgb(0.0, 1.0, 0.5) == (255, 0, 0)
        assert hsl_to_rgb(120.0, 1.0, 0.5) == (0, 255, 0)
        assert hsl_to_rgb(240.0, 1.0, 0.5) == (0, 0, 255)

    def test_achromatic_uses_lightness(self):
        assert hsl_to_rgb(200.0, 0.0, 0.5) == (128, 128, 128)

    def test_dark_color_q_branch(self):
        """l < 0.5 uses q = l * (1 + s)."""
        assert hsl_to_rgb(0.0, 1.0, 0.25) == (128, 0, 0)


class TestAchromaticFixedPoint:
    """Grays have zero saturation and convert back to themselves."""

    @pytest.mark.parametrize("v", [0, 1, 64, 127, 128, 200, 254, 255])
    def test_gray_roundtrip(self, v):
        hsl = rgb_to_hsl(v, v, v)
        assert hsl.s == 0
        expected = round_half_up(hsl.l * 255)
        assert hsl_to_rgb(hsl.h, hsl.s, hsl.l) == (expected, expected, expected)
        assert expected == v


class TestRoundtrip:

    def test_rgb_hsl_rgb_exact(self):
        for r, g, b in _sample_rgb():
            rgb = (int(r), int(g), int(b))
            hsl = rgb_to_hsl(*rgb)
            assert hsl_to_rgb(hsl.h, hsl.s, hsl.l) == rgb


class TestBatch:
    """Vectorized conversions must agree with the scalar path."""

    def test_rgb_to_hsl_batch_matches_scalar(self):
        rgb = _sample_rgb()
        batch = rgb_to_hsl_batch(rgb)
        scalar = np.array([
            [hsl.h, hsl.s, hsl.l]
            for hsl in (rgb_to_hsl(int(r), int(g), int(b)) for r, g, b in rgb)
        ])
        np.testing.assert_allclose(batch, scalar, atol=1e-12)

    def test_hsl_to_rgb_batch_matches_scalar(self):
        rng = np.random.default_rng(7)
        hsl = np.column_stack([
            rng.random(500) * 360,
            rng.random(500),
            rng.random(500),
        ])
        batch = hsl_to_rgb_batch(hsl)
        scalar = np.array([hsl_to_rgb(h, s, l) for h, s, l in hsl])
        np.testing.assert_array_equal(batch, scalar)

    def test_batch_achromatic(self):
        hsl = rgb_to_hsl_batch(np.array([[128, 128, 128], [0, 0, 0]]))
        np.testing.assert_array_equal(hsl[:, 1], [0.0, 0.0])
        np.testing.assert_array_equal(hsl_to_rgb_batch(hsl), [[128, 128, 128], [0, 0, 0]])

    def test_batch_preserves_shape(self):
        rgb = _sample_rgb(12).reshape(2, 2, 3, 3)
        hsl = rgb_to_hsl_batch(rgb)
        assert hsl.shape == (2, 2, 3, 3)
        np.testing.assert_array_equal(hsl_to_rgb_batch(hsl), rgb)

    def test_uint8_input(self):
        pixels = np.array([[255, 0, 0]], dtype=np.uint8)
        hsl = rgb_to_hsl_batch(pixels)
        np.testing.assert_allclose(hsl, [[0.0, 1.0, 0.5]])
