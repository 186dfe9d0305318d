# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Abstract geometric variants: Bauhaus shapes, constellation-like beams and
circuit-board traces.
"""

from __future__ import annotations

from itertools import combinations

from hashglyph.render.patterns.context import PatternContext, backdrop, inset
from hashglyph.schema import (
    Circle,
    Line,
    Paint,
    Path,
    Polygon,
    Primitive,
    Rect,
    Scene,
    Transform,
)

BAUHAUS_PALETTE = (
    "#FFB900",
    "#E74856",
    "#0078D7",
    "#0099BC",
    "#7A7574",
    "#FF4343",
    "#00CC6A",
    "#8E8CD8",
)


def generate_bauhaus(ctx: PatternContext) -> Scene:
    """
    Three to five overlapping flat shapes on a palette background.

    Seed offsets: 0 background, 1 shape count. Shape i reads i+2 (type and
    size), i+5 (x and opacity) and i+8 (y).
    """
    seed = ctx.seed
    palette_size = len(BAUHAUS_PALETTE)
    bg_index = seed.draw(0, palette_size)
    count = 3 + seed.draw(1, 3)

    shapes: list[Primitive] = []
    for i in range(count):
        h1, h2, h3 = seed[i + 2], seed[i + 5], seed[i + 8]
        paint = Paint(
            fill=BAUHAUS_PALETTE[(bg_index + i + 1) % palette_size],
            opacity=0.5 + (h2 % 5) / 10,
        )
        x = h2 % 100
        y = h3 % 100
        width = 20 + h1 % 60
        half = width // 2

        shape_type = h1 % 3
        if shape_type == 0:
            shapes.append(Circle(x, y, half, paint))
        elif shape_type == 1:
            transform = None
            if h1 % 2 == 0:
                transform = Transform(rotate=(45, x, y))
            shapes.append(Rect(
                x - half, y - half, width, width, paint, transform,
            ))
        else:
            shapes.append(Polygon(
                ((x, y - half), (x - half, y + half), (x + half, y + half)),
                paint,
            ))

    return Scene(
        view_box=100,
        elements=(backdrop(100, BAUHAUS_PALETTE[bg_index]), inset(100, shapes)),
    )


BEAM_POINTS = 6

# Squared distance beyond which two points are not connected
BEAM_REACH_SQ = 3600


def generate_beam(ctx: PatternContext) -> Scene:
    """
    Six nodes joined by lines that fade with distance.

    Seed offsets: node i reads i (x) and i+6 (y).
    """
    seed = ctx.seed
    color = ctx.color.hex
    points = [
        (10 + seed.draw(i, 80), 10 + seed.draw(i + 6, 80))
        for i in range(BEAM_POINTS)
    ]

    node_paint = Paint(fill=color)
    elements: list[Primitive] = [Circle(x, y, 3, node_paint) for x, y in points]

    for (x1, y1), (x2, y2) in combinations(points, 2):
        dist_sq = (x1 - x2) ** 2 + (y1 - y2) ** 2
        if dist_sq >= BEAM_REACH_SQ:
            continue
        elements.append(Line(x1, y1, x2, y2, Paint(
            stroke=color,
            stroke_width=1,
            opacity=round(1.0 - dist_sq / BEAM_REACH_SQ, 2),
        )))

    return Scene(
        view_box=100,
        elements=(backdrop(100, "#0a0a0a"), inset(100, elements)),
    )


BOARD_COLORS = ("#004d40", "#1a237e", "#212121", "#1b5e20")
TRACE_COLOR = "#ffd700"
TRACE_COUNT = 5


def generate_circuit(ctx: PatternContext) -> Scene:
    """
    Right-angled gold traces with solder pads on a board color.

    Seed offsets: 0 board color. Trace i reads i (x1), i+5 (y1), i+2 (x2)
    and i+7 (y2).
    """
    seed = ctx.seed
    trace = Paint(fill="none", stroke=TRACE_COLOR, stroke_width=2, opacity=0.8)
    pad = Paint(fill=TRACE_COLOR)

    elements: list[Primitive] = []
    for i in range(TRACE_COUNT):
        x1 = 10 + seed.draw(i, 80)
        y1 = 10 + seed.draw(i + 5, 80)
        x2 = 10 + seed.draw(i + 2, 80)
        y2 = 10 + seed.draw(i + 7, 80)
        elements.append(Path(f"M {x1} {y1} L {x2} {y1} L {x2} {y2}", trace))
        elements.append(Circle(x1, y1, 3, pad))
        elements.append(Circle(x2, y2, 3, pad))

    return Scene(
        view_box=100,
        elements=(
            backdrop(100, seed.pick(BOARD_COLORS, 0)),
            inset(100, elements),
        ),
    )
