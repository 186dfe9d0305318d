# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Tests for color space conversions (sRGB, OKLab, OKLCH, 8-bit)."""

import numpy as np
import pytest

from hashglyph.render.colorspace import (
    hex_to_oklch,
    linear_rgb_to_oklab,
    linear_to_srgb,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_hex,
    oklch_to_oklab,
    oklch_to_rgb8,
    oklch_to_srgb,
    srgb_to_linear,
    srgb_to_oklch,
    srgb_uint8_to_oklch,
)


class TestTransferFunction:
    """sRGB gamma encode/decode."""

    def test_roundtrip_grid(self):
        srgb = np.linspace(0.0, 1.0, 21)
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(srgb)), srgb, atol=1e-10)

    def test_linear_segment_below_threshold(self):
        linear = srgb_to_linear(np.array([0.03]))
        assert float(linear[0]) == pytest.approx(0.03 / 12.92, abs=1e-10)

    def test_encode_clips_out_of_range(self):
        encoded = linear_to_srgb(np.array([-0.5, 1.7]))
        np.testing.assert_allclose(encoded, [0.0, 1.0])


class TestOKLab:

    def test_white_lightness_is_one(self):
        lab = linear_rgb_to_oklab(np.array([1.0, 1.0, 1.0]))
        assert lab[0] == pytest.approx(1.0, abs=1e-6)
        assert abs(lab[1]) < 1e-4
        assert abs(lab[2]) < 1e-4

    def test_black_lightness_is_zero(self):
        lab = linear_rgb_to_oklab(np.array([0.0, 0.0, 0.0]))
        assert lab[0] == pytest.approx(0.0, abs=1e-6)

    def test_inverse_matches_forward(self):
        rgb = np.random.RandomState(7).random((40, 3))
        np.testing.assert_allclose(oklab_to_linear_rgb(linear_rgb_to_oklab(rgb)), rgb, atol=1e-6)


class TestOKLCH:

    def test_polar_roundtrip(self):
        lab = np.array([0.7, 0.1, -0.05])
        np.testing.assert_allclose(oklch_to_oklab(oklab_to_oklch(lab)), lab, atol=1e-10)

    def test_chroma_is_radius(self):
        lch = oklab_to_oklch(np.array([0.5, 0.3, 0.4]))
        assert lch[1] == pytest.approx(0.5, abs=1e-10)

    def test_hue_in_degrees(self):
        lch = oklab_to_oklch(np.array([0.5, 0.0, 0.1]))
        assert lch[2] == pytest.approx(90.0, abs=1e-9)

    def test_hue_range(self):
        lch = oklab_to_oklch(np.array([0.5, -0.1, -0.1]))
        assert 0.0 <= lch[2] < 360.0

    def test_full_chain_primaries(self):
        for primary in ([1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]):
            srgb = np.array(primary)
            np.testing.assert_allclose(oklch_to_srgb(srgb_to_oklch(srgb)), srgb, atol=1e-4)

    def test_uint8_input(self):
        lch = srgb_uint8_to_oklch(np.array([[128, 64, 200]], dtype=np.uint8))
        assert lch.shape == (1, 3)
        assert 0.0 <= lch[0, 0] <= 1.0
        assert lch[0, 1] >= 0.0


class TestEightBit:

    def test_black(self):
        assert oklch_to_rgb8(0.0, 0.0, 0.0) == (0, 0, 0)

    def test_out_of_gamut_is_clamped(self):
        for hue in range(0, 360, 30):
            r, g, b = oklch_to_rgb8(0.7, 0.4, float(hue))
            assert all(0 <= v <= 255 for v in (r, g, b))

    def test_returns_python_ints(self):
        assert all(type(v) is int for v in oklch_to_rgb8(0.6, 0.1, 200.0))


class TestHexConversion:

    def test_hex_format(self):
        hex_val = oklch_to_hex(0.6, 0.12, 30.0)
        assert hex_val.startswith("#")
        assert len(hex_val) == 7
        assert hex_val == hex_val.lower()

    def test_hex_to_oklch_black(self):
        L, _, _ = hex_to_oklch("#000000")
        assert L == pytest.approx(0.0, abs=0.01)

    def test_hex_to_oklch_white_is_achromatic(self):
        L, _, H = hex_to_oklch("FFFFFF")
        assert L == pytest.approx(1.0, abs=0.01)
        assert H is None

    def test_hex_to_oklch_chromatic_has_hue(self):
        _, C, H = hex_to_oklch("#9754a1")
        assert C > 0.05
        assert H is not None
