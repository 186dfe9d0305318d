# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Bitmap-font variants: LED dot matrix and retro terminal blocks."""

from __future__ import annotations

from hashglyph.render.patterns.context import PatternContext, backdrop, inset
from hashglyph.render.text import (
    BLOCK_FONT,
    DOT_FONT,
    glyph_for,
    initials_of,
    lit_cells,
)
from hashglyph.schema import Circle, Paint, Primitive, Rect, Scene, TilePattern

# Dot matrix layout
DOT_RADIUS = 4
DOT_SPACING = 12
DOT_LETTER_GAP = 10
DOT_ORIGIN = (20, 35)


def generate_dotmatrix(ctx: PatternContext) -> Scene:
    """
    Initials on a 5x7 LED grid.

    Lit dots get a translucent halo; unlit dots stay visible as dim sockets.
    """
    color = ctx.color.hex
    glow = Paint(fill=color, opacity=0.4)
    lit = Paint(fill=color)
    unlit = Paint(fill="#333", opacity=0.3)

    dots: list[Primitive] = []
    origin_x, origin_y = DOT_ORIGIN
    for char in initials_of(ctx.name):
        glyph = glyph_for(DOT_FONT, char)
        for row, bits in enumerate(glyph):
            for col, bit in enumerate(bits):
                cx = origin_x + col * DOT_SPACING
                cy = origin_y + row * DOT_SPACING
                if bit == "1":
                    dots.append(Circle(cx, cy, DOT_RADIUS + 2, glow))
                    dots.append(Circle(cx, cy, DOT_RADIUS, lit))
                else:
                    dots.append(Circle(cx, cy, DOT_RADIUS, unlit))
        origin_x += 5 * DOT_SPACING + DOT_LETTER_GAP

    return Scene(
        view_box=170,
        elements=(backdrop(170, "#111111"), inset(170, dots)),
    )


# Terminal layout
BLOCK_SIZE = 20
BLOCK_GAP = 2
BLOCK_LETTER_GAP = 20
BLOCK_ORIGIN = (40, 60)
SHADOW_OFFSET = 4

SCANLINES = TilePattern(
    id="scanlines",
    width=10,
    height=4,
    children=(Rect(0, 0, 10, 2, Paint(fill="#000", opacity=0.3)),),
)


def generate_terminal(ctx: PatternContext) -> Scene:
    """
    Initials in a 5x5 block font with drop shadows and a blinking-style
    cursor, over CRT scanlines.
    """
    color = ctx.color.hex
    shadow = Paint(fill="#000", opacity=0.5)
    face = Paint(fill=color)
    pitch = BLOCK_SIZE + BLOCK_GAP

    blocks: list[Primitive] = []
    origin_x, origin_y = BLOCK_ORIGIN
    for char in initials_of(ctx.name):
        for row, col in lit_cells(glyph_for(BLOCK_FONT, char)):
            x = origin_x + col * pitch
            y = origin_y + row * pitch
            blocks.append(Rect(
                x + SHADOW_OFFSET, y + SHADOW_OFFSET,
                BLOCK_SIZE, BLOCK_SIZE, shadow,
            ))
            blocks.append(Rect(x, y, BLOCK_SIZE, BLOCK_SIZE, face))
        origin_x += 5 * pitch + BLOCK_LETTER_GAP

    # Cursor sits on the baseline row after the last letter
    blocks.append(Rect(
        origin_x, origin_y + 4 * pitch, BLOCK_SIZE, BLOCK_SIZE,
        Paint(fill=color, opacity=0.7),
    ))

    return Scene(
        view_box=350,
        elements=(
            backdrop(350, "#1a1b26"),
            backdrop(350, "url(#scanlines)"),
            inset(350, blocks),
        ),
        defs=(SCANLINES,),
    )
