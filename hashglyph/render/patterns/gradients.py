# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Gradient-driven variants: tri-color ring and turbulent marble."""

from __future__ import annotations

from hashglyph.render.color import derive_color
from hashglyph.render.patterns.context import PatternContext, inset
from hashglyph.render.seed import derive_seed
from hashglyph.schema import (
    Circle,
    GradientStop,
    LinearGradient,
    NoiseFilter,
    Paint,
    Rect,
    Scene,
)


def generate_ring(ctx: PatternContext) -> Scene:
    """
    Disc filled with a rotated three-stop gradient.

    The second and third stops are the colors of the name salted with "2"
    and "3". Seed offset 0 gives the rotation; bytes 0-2 name the gradient.
    """
    seed = ctx.seed
    grad = LinearGradient(
        id=f"grad-{seed.hexdigest(0, 3)}",
        stops=(
            GradientStop(0, ctx.color.hex),
            GradientStop(50, derive_color(derive_seed(ctx.name, "2")).hex),
            GradientStop(100, derive_color(derive_seed(ctx.name, "3")).hex),
        ),
        rotation=seed.draw(0, 360),
    )
    disc = Circle(50, 50, 50, Paint(fill=f"url(#{grad.id})"))
    return Scene(view_box=100, elements=(inset(100, (disc,)),), defs=(grad,))


def generate_marble(ctx: PatternContext) -> Scene:
    """
    Two-color gradient under a lit fractal-noise overlay.

    Seed offsets: 0 noise frequency, 1 octave count (1-4).
    """
    seed = ctx.seed
    secondary = derive_color(derive_seed(ctx.name, "x"))
    liquid = NoiseFilter(
        id="liquid",
        base_frequency=round(0.005 + seed.unit(0) * 0.02, 4),
        octaves=1 + seed.draw(1, 4),
    )
    grad = LinearGradient(
        id="grad",
        stops=(GradientStop(0, ctx.color.hex), GradientStop(100, secondary.hex)),
    )
    layers = (
        Rect(0, 0, 100, 100, Paint(fill="url(#grad)")),
        Rect(0, 0, 100, 100, Paint(
            fill="transparent",
            filter="url(#liquid)",
            opacity=0.5,
            blend_mode="overlay",
        )),
    )
    return Scene(view_box=100, elements=(inset(100, layers),), defs=(liquid, grad))
