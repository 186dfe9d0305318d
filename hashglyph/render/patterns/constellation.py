# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Star-chart variant drawn from the bundled constellation catalog."""

from __future__ import annotations

from hashglyph.render.catalog import load_catalog, normalize_lines
from hashglyph.render.patterns.context import PatternContext, backdrop
from hashglyph.schema import (
    Circle,
    Font,
    GradientStop,
    Line,
    Paint,
    Primitive,
    RadialGradient,
    Scene,
    Text,
)

STAR_COUNT = 40

NIGHT_SKY = RadialGradient(
    id="grad",
    stops=(GradientStop(0, "#1e1b4b"), GradientStop(100, "#020617")),
    r=80,
)

_SEGMENT = Paint(stroke="#93c5fd", stroke_width=0.5, opacity=0.8)
_STAR = Paint(fill="white")
_HALO = Paint(fill="#38bdf8", opacity=0.2)
_LABEL_FONT = Font("Times New Roman", 6, weight="bold")


def star_field(ctx: PatternContext) -> list[Primitive]:
    """Forty faint background stars scattered by the seed bytes."""
    seed = ctx.seed
    stars: list[Primitive] = []
    for i in range(STAR_COUNT):
        x = (seed[i] * (i + 3)) % 100
        y = (seed[i + 2] * (i + 5)) % 100
        opacity = (seed.draw(i, 5) + 1) / 10
        stars.append(Circle(x, y, 0.4, Paint(fill="white", opacity=opacity)))
    return stars


def generate_constellation(ctx: PatternContext) -> Scene:
    """
    One catalog figure, fitted to the canvas and labelled.

    Seed offset 0 selects the figure. Every segment is drawn as a line with
    a star and halo at its start; each polyline ends with a bare star.
    """
    catalog = ctx.catalog or load_catalog()
    figure = catalog[ctx.seed.draw(0, len(catalog))]

    elements: list[Primitive] = [backdrop(100, "url(#grad)"), *star_field(ctx)]
    for line in normalize_lines(figure.lines):
        points = [(round(x, 1), round(y, 1)) for x, y in line]
        for (x1, y1), (x2, y2) in zip(points, points[1:]):
            elements.append(Line(x1, y1, x2, y2, _SEGMENT))
            elements.append(Circle(x1, y1, 1.5, _STAR))
            elements.append(Circle(x1, y1, 3, _HALO))
        last_x, last_y = points[-1]
        elements.append(Circle(last_x, last_y, 1.5, _STAR))

    elements.append(Text(
        x=50,
        y=90,
        lines=(figure.name.upper(),),
        font=_LABEL_FONT,
        paint=Paint(fill="#7dd3fc"),
        anchor="middle",
        letter_spacing=0.5,
    ))
    return Scene(view_box=100, elements=tuple(elements), defs=(NIGHT_SKY,))
