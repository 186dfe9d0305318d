# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: OKLCH → OKLab → LMS → Linear RGB → sRGB → 8-bit

References:
- OKLab: https://bottosson.github.io/posts/oklab/
- OKLCH: Cylindrical form of OKLab (Lightness, Chroma, Hue)

All conversions are pure NumPy so the same input yields the same bytes on
every run. The forward direction (sRGB → OKLCH) is kept for contrast checks
on caller-supplied colors.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4)
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Values <= 0.0031308 are scaled linearly by 12.92, larger values use
    1.055 * v^(1/2.4) - 0.055. Out-of-gamut input is clipped, never wrapped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ OKLab
# =============================================================================

# Matrices from https://bottosson.github.io/posts/oklab/

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

# Published inverses. Using the reference coefficients rather than
# np.linalg.inv keeps the 8-bit output identical to other OKLCH renderers.
_M2_INV = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
], dtype=np.float64)

_M1_INV = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
], dtype=np.float64)


def linear_rgb_to_oklab(rgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to OKLab.

    Args:
        rgb: Array of shape (..., 3) with linear RGB values

    Returns:
        Array of shape (..., 3) with OKLab values (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)

    lms = np.einsum('...j,ij->...i', rgb, _M1)

    # Cube root (handle negative values for out-of-gamut colors)
    lms_cbrt = np.sign(lms) * np.abs(lms) ** (1.0 / 3.0)

    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to linear RGB.

    Args:
        lab: Array of shape (..., 3) with OKLab values (L, a, b)

    Returns:
        Array of shape (..., 3) with linear RGB values, possibly outside
        [0, 1] for out-of-gamut colors
    """
    lab = np.asarray(lab, dtype=np.float64)

    lms_cbrt = np.einsum('...j,ij->...i', lab, _M2_INV)
    lms = lms_cbrt ** 3

    return np.einsum('...j,ij->...i', lms, _M1_INV)


# =============================================================================
# OKLab ↔ OKLCH
# =============================================================================


def oklab_to_oklch(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLab to OKLCH (cylindrical coordinates).

    Returns:
        Array of shape (..., 3) with OKLCH values (L, C, H), H in [0, 360)
    """
    lab = np.asarray(lab, dtype=np.float64)

    L = lab[..., 0]
    a = lab[..., 1]
    b = lab[..., 2]

    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0

    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to OKLab.

    Args:
        lch: Array of shape (..., 3) with OKLCH values (L, C, H), H in degrees
    """
    lch = np.asarray(lch, dtype=np.float64)

    L = lch[..., 0]
    C = lch[..., 1]
    H_rad = lch[..., 2] * (np.pi / 180.0)

    a = C * np.cos(H_rad)
    b = C * np.sin(H_rad)

    return np.stack([L, a, b], axis=-1)


# =============================================================================
# Convenience: sRGB ↔ OKLCH (full chain)
# =============================================================================


def srgb_to_oklch(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to OKLCH.

    Full chain: sRGB → Linear RGB → OKLab → OKLCH
    """
    linear = srgb_to_linear(srgb)
    lab = linear_rgb_to_oklab(linear)
    return oklab_to_oklch(lab)


def oklch_to_srgb(lch: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB [0,1].

    Full chain: OKLCH → OKLab → Linear RGB → sRGB. Values are clipped to
    [0, 1], so out-of-gamut coordinates are mapped to the nearest edge.
    """
    lab = oklch_to_oklab(lch)
    linear = oklab_to_linear_rgb(lab)
    return linear_to_srgb(linear)


def srgb_uint8_to_oklch(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """Convert uint8 sRGB pixels [0,255] of shape (..., 3) to OKLCH."""
    srgb_float = np.asarray(pixels).astype(np.float64) / 255.0
    return srgb_to_oklch(srgb_float)


def oklch_to_rgb8(L: float, C: float, H: float) -> tuple[int, int, int]:
    """
    Convert one OKLCH coordinate to an 8-bit sRGB triplet.

    Each channel is ``clamp(v, 0, 1) * 255`` truncated toward zero, so
    out-of-gamut inputs never crash or wrap.

    Args:
        L: Lightness [0, 1]
        C: Chroma (>= 0)
        H: Hue in degrees

    Returns:
        (r, g, b) tuple with each component in [0, 255]
    """
    srgb = oklch_to_srgb(np.array([L, C, H], dtype=np.float64))
    r, g, b = (srgb * 255.0).astype(np.int64)
    return int(r), int(g), int(b)


def oklch_to_hex(L: float, C: float, H: float | None) -> str:
    """
    Convert OKLCH values to a lowercase hex color string.

    Args:
        L: Lightness [0, 1]
        C: Chroma [0, ~0.4]
        H: Hue in degrees [0, 360), or None for achromatic

    Returns:
        Hex color string like "#9754a1"
    """
    if H is None:
        H = 0.0
    r, g, b = oklch_to_rgb8(L, C, H)
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_oklch(hex_color: str) -> tuple[float, float, float | None]:
    """
    Convert a 6-digit hex color string to OKLCH values.

    Args:
        hex_color: Hex string like "#3941C8" or "3941C8"

    Returns:
        Tuple of (L, C, H) where H is None for achromatic colors
    """
    hex_color = hex_color.lstrip("#")

    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)

    pixels = np.array([r, g, b], dtype=np.uint8)
    lch = srgb_uint8_to_oklch(pixels)

    L, C, H = float(lch[0]), float(lch[1]), float(lch[2])

    # Mark as achromatic if chroma is very low
    if C < 0.01:
        H = None

    return L, C, H
