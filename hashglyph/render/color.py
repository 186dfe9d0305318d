# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Color derivation from seeds.

Generated colors live in a narrow OKLCH band: any hue, chroma 0.10-0.16,
lightness 0.55-0.68. Inside that band every hue is vivid enough to read as a
brand color and still carries white overlay text legibly.
"""

from __future__ import annotations

import logging
from typing import Optional

from hashglyph.exceptions import MalformedInput
from hashglyph.render.seed import Seed
from hashglyph.schema import OKLCHColor, RGBColor

logger = logging.getLogger(__name__)

CHROMA_BASE = 0.10
CHROMA_RANGE = 0.06
LIGHTNESS_BASE = 0.55
LIGHTNESS_RANGE = 0.13

# Backgrounds lighter than this get dark text
TEXT_CONTRAST_LIGHTNESS = 0.75

WHITE = RGBColor(255, 255, 255)
INK = RGBColor(17, 17, 17)


def derive_oklch(seed: Seed) -> OKLCHColor:
    """
    Map seed bytes 0-3 to an OKLCH coordinate.

    - bytes 0-1 (big-endian word): hue over the full circle
    - byte 2: chroma offset within the band
    - byte 3: lightness offset within the band
    """
    hue = (seed.word(0) / 65535.0 * 360.0) % 360.0
    chroma = CHROMA_BASE + seed.unit(2) * CHROMA_RANGE
    lightness = LIGHTNESS_BASE + seed.unit(3) * LIGHTNESS_RANGE
    return OKLCHColor(L=lightness, C=chroma, H=hue)


def derive_color(seed: Seed) -> RGBColor:
    """Derive the display color for a seed."""
    return derive_oklch(seed).to_rgb()


def resolve_color(explicit: Optional[str], seed: Seed) -> RGBColor:
    """
    Use the caller's color when it parses, otherwise the derived one.

    A malformed explicit color is not an error for the caller: it is logged
    and replaced by the seed's color.
    """
    if explicit:
        try:
            return RGBColor.from_hex(explicit)
        except MalformedInput as e:
            logger.warning("Ignoring explicit color: %s", e.message)
    return derive_color(seed)


def contrast_text_color(background: RGBColor) -> RGBColor:
    """White text on mid/dark backgrounds, near-black on light ones."""
    if background.lightness > TEXT_CONTRAST_LIGHTNESS:
        return INK
    return WHITE
