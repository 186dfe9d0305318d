# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Rendering core for hashglyph.

Seed derivation, color derivation, pattern generators and raster
vectorization. Everything except the portrait fetch is pure and
deterministic.
"""

from hashglyph.render.color import derive_color, resolve_color
from hashglyph.render.compose import (
    PORTRAIT,
    VARIANTS,
    ComposeConfig,
    available_variants,
    compose,
)
from hashglyph.render.dither import DitherConfig, RasterSample, vectorize
from hashglyph.render.fetch import FetchConfig, fetch_raster
from hashglyph.render.seed import Seed, derive_seed
from hashglyph.render.text import initials_of

__all__ = [
    "compose",
    "available_variants",
    "VARIANTS",
    "PORTRAIT",
    "ComposeConfig",
    "derive_seed",
    "Seed",
    "derive_color",
    "resolve_color",
    "initials_of",
    "vectorize",
    "DitherConfig",
    "RasterSample",
    "fetch_raster",
    "FetchConfig",
]
