# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Pattern generators.

Each generator is a pure function from a PatternContext to a Scene in its
own logical viewbox. Generators never touch the network or global state.
"""

from hashglyph.render.patterns.bitmap import generate_dotmatrix, generate_terminal
from hashglyph.render.patterns.constellation import generate_constellation
from hashglyph.render.patterns.context import Generator, PatternContext
from hashglyph.render.patterns.geometric import (
    generate_bauhaus,
    generate_beam,
    generate_circuit,
)
from hashglyph.render.patterns.gradients import generate_marble, generate_ring
from hashglyph.render.patterns.grid import generate_dither, generate_gravatar
from hashglyph.render.patterns.initials import (
    generate_ascii,
    generate_avatar,
    generate_glitch,
)
from hashglyph.render.patterns.scenes import (
    generate_pixel,
    generate_smile,
    generate_sunset,
)

__all__ = [
    "PatternContext",
    "Generator",
    # Typographic
    "generate_avatar",
    "generate_glitch",
    "generate_ascii",
    "generate_dotmatrix",
    "generate_terminal",
    # Grids
    "generate_gravatar",
    "generate_dither",
    # Geometric
    "generate_bauhaus",
    "generate_beam",
    "generate_circuit",
    # Gradients
    "generate_ring",
    "generate_marble",
    # Scenes
    "generate_sunset",
    "generate_smile",
    "generate_pixel",
    "generate_constellation",
]
