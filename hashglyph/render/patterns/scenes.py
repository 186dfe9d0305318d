# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Illustrated variants: landscape, face and isometric cube."""

from __future__ import annotations

import math

from hashglyph.render.patterns.context import PatternContext, backdrop, inset
from hashglyph.schema import (
    Circle,
    GradientStop,
    Line,
    LinearGradient,
    Paint,
    Path,
    Primitive,
    Rect,
    Scene,
)

# (sky top, sky bottom, sun, mountains) per mood
SUNSET_MOODS = (
    ("#3e1c6b", "#ff8a5c", "#ffeb3b", "#1a1a1a"),  # dusk
    ("#29b6f6", "#fff9c4", "#ffffff", "#4caf50"),  # day
    ("#0d1b2a", "#415a77", "#ffffff", "#1a1a1a"),  # night
)


def mountain_path(phase: int) -> str:
    """Jagged ridge: a sine profile dipped by 5 units on every tenth step."""
    parts = ["M 0 100 L 0 60"]
    for x in range(0, 101, 5):
        y = 60.0 + math.sin(x * 0.1 + phase) * 15.0
        if x % 10 == 0:
            y -= 5
        parts.append(f"L {x} {y:.2f}")
    parts.append("L 100 100 Z")
    return " ".join(parts)


def generate_sunset(ctx: PatternContext) -> Scene:
    """
    Sky gradient, sun and mountain ridge.

    Seed offsets: 0 mood, 1 sun x, 2 sun y, 3 ridge phase.
    """
    seed = ctx.seed
    sky_top, sky_bottom, sun, mountains = seed.pick(SUNSET_MOODS, 0)
    sky = LinearGradient(
        id="sky",
        stops=(GradientStop(0, sky_top), GradientStop(100, sky_bottom)),
        x2=0,
        y2=100,
    )
    landscape = (
        Circle(
            20 + seed.draw(1, 60),
            20 + seed.draw(2, 30),
            8,
            Paint(fill=sun, opacity=0.9),
        ),
        Path(mountain_path(seed[3]), Paint(fill=mountains, opacity=0.9)),
    )
    return Scene(
        view_box=100,
        elements=(backdrop(100, "url(#sky)"), inset(100, landscape)),
        defs=(sky,),
    )


SKIN_TONES = (
    "#FFDFC4",
    "#F0C8C9",
    "#E5B99F",
    "#8D5524",
    "#C68642",
    "#FFDCB1",
    "#E0AC69",
    "#B9D2B1",
    "#A8C8E8",
)

_FEATURE = "#333"


def _eyes(kind: int) -> list[Primitive]:
    solid = Paint(fill=_FEATURE)
    if kind == 0:
        return [Circle(35, 45, 5, solid), Circle(65, 45, 5, solid)]
    if kind == 1:
        arc = Paint(fill="none", stroke=_FEATURE, stroke_width=3)
        return [
            Path("M 30 45 Q 35 40 40 45", arc),
            Path("M 60 45 Q 65 40 70 45", arc),
        ]
    # wink
    return [Circle(35, 45, 5, solid), Rect(60, 44, 10, 2, solid)]


def _mouth(kind: int) -> Primitive:
    if kind == 0:
        return Path("M 35 65 Q 50 75 65 65", Paint(
            fill="none", stroke=_FEATURE, stroke_width=3, stroke_linecap="round",
        ))
    if kind == 1:
        return Path("M 35 65 Q 50 80 65 65 Z", Paint(
            fill="#fff", stroke=_FEATURE, stroke_width=2,
        ))
    if kind == 2:
        return Line(40, 70, 60, 70, Paint(
            stroke=_FEATURE, stroke_width=3, stroke_linecap="round",
        ))
    return Circle(50, 70, 6, Paint(fill="none", stroke=_FEATURE, stroke_width=3))


def generate_smile(ctx: PatternContext) -> Scene:
    """
    Cartoon face.

    Seed offsets: 0 skin tone, 1 eyes (3 kinds), 2 mouth (4 kinds),
    3 blush when even.
    """
    seed = ctx.seed
    face: list[Primitive] = [
        Circle(50, 50, 45, Paint(fill=seed.pick(SKIN_TONES, 0))),
        *_eyes(seed.draw(1, 3)),
        _mouth(seed.draw(2, 4)),
    ]
    if seed[3] % 2 == 0:
        blush = Paint(fill="#ff0000", opacity=0.2)
        face += [Circle(30, 55, 5, blush), Circle(70, 55, 5, blush)]

    return Scene(view_box=100, elements=(inset(100, face),))


CUBE_LEFT = "M 20 35 L 50 50 L 50 80 L 20 65 Z"
CUBE_RIGHT = "M 50 50 L 80 35 L 80 65 L 50 80 Z"
CUBE_TOP = "M 50 20 L 80 35 L 50 50 L 20 35 Z"
CUBE_INLAY = "M 50 30 L 70 40 L 50 50 L 30 40 Z"


def generate_pixel(ctx: PatternContext) -> Scene:
    """
    Isometric cube in the primary color, shaded per face.

    Seed offsets: 0 adds a light inlay on the top face when even.
    """
    base = Paint(fill=ctx.color.hex)
    cube: list[Primitive] = [
        Path(CUBE_LEFT, base),
        Path(CUBE_RIGHT, base),
        Path(CUBE_RIGHT, Paint(fill="black", opacity=0.2)),
        Path(CUBE_TOP, base),
        Path(CUBE_TOP, Paint(fill="white", opacity=0.3)),
    ]
    if ctx.seed[0] % 2 == 0:
        cube.append(Path(CUBE_INLAY, Paint(fill="rgba(255,255,255,0.3)")))

    return Scene(
        view_box=100,
        elements=(backdrop(100, "#f0f0f0"), inset(100, cube)),
    )
