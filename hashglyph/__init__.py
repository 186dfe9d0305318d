# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Hashglyph -- deterministic vector avatars from names.

Hashes an input string to a 16-byte seed and turns it into an SVG: a
perceptually even OKLCH brand color plus one of sixteen pattern variants,
or a dithered vector portrait of a remote image.

Quick start::

    from hashglyph import compose

    doc = compose("avatar", "Alex Morgan", size=64)
    doc.to_svg()    # SVG markup
    doc.to_json()   # Primitive tree as JSON
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from hashglyph.exceptions import (
    HashglyphError,
    InvalidVariant,
    MalformedInput,
    SourceFetchFailure,
)
from hashglyph.render import (
    available_variants,
    compose,
    derive_color,
    derive_seed,
    initials_of,
    vectorize,
)
from hashglyph.schema import RGBColor, Scene, VectorDocument

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core API
    "compose",
    "available_variants",
    "VectorDocument",
    # Building blocks
    "derive_seed",
    "derive_color",
    "initials_of",
    "vectorize",
    # Types (commonly needed)
    "RGBColor",
    "Scene",
    # Errors
    "HashglyphError",
    "InvalidVariant",
    "MalformedInput",
    "SourceFetchFailure",
    # Version
    "__version__",
]
