# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Typographic variants: classic initials avatar, glitch initials and the
ASCII robot.
"""

from __future__ import annotations

from hashglyph.render.color import contrast_text_color
from hashglyph.render.patterns.context import PatternContext, backdrop, inset
from hashglyph.render.text import initials_of
from hashglyph.schema import Circle, Font, Paint, Rect, Scene, Text

NBSP = "\u00a0"


def generate_avatar(ctx: PatternContext) -> Scene:
    """Filled circle in the primary color with the initials on top."""
    initials = initials_of(ctx.name)
    text_color = contrast_text_color(ctx.color)
    return Scene(
        view_box=100,
        elements=(inset(100, (
            Circle(50, 50, 50, Paint(fill=ctx.color.hex)),
            Text(
                x=50,
                y=55,
                lines=(initials,),
                font=Font("Arial, sans-serif", 40),
                paint=Paint(fill=text_color.hex),
                anchor="middle",
                baseline="middle",
            ),
        )),),
    )


_GLITCH_FONT = Font("Arial Black, sans-serif", 50, weight="900")

# (x offset, fill, opacity, blend) for the cyan, red and white passes
_GLITCH_LAYERS = (
    (48, "#00ffff", 0.8, "screen"),
    (52, "#ff0000", 0.8, "screen"),
    (50, "#ffffff", None, None),
)


def generate_glitch(ctx: PatternContext) -> Scene:
    """
    Chromatic-aberration initials with translucent scan bars.

    Seed offsets: bar i reads bytes i (y), i+5 (height), i+10 (width),
    i+2 (x).
    """
    initials = initials_of(ctx.name)
    seed = ctx.seed

    layers = [
        Text(
            x=x,
            y=55,
            lines=(initials,),
            font=_GLITCH_FONT,
            paint=Paint(fill=fill, opacity=opacity, blend_mode=blend),
            anchor="middle",
            baseline="middle",
        )
        for x, fill, opacity, blend in _GLITCH_LAYERS
    ]

    bars = [
        Rect(
            x=seed.draw(i + 2, 80),
            y=seed.draw(i, 100),
            width=seed.draw(i + 10, 50) + 20,
            height=seed.draw(i + 5, 5) + 1,
            paint=Paint(fill="white", opacity=0.1),
        )
        for i in range(5)
    ]

    return Scene(
        view_box=100,
        elements=(backdrop(100, "#0f0f0f"), inset(100, layers + bars)),
    )


ROBOT_HEADS = (
    " /_\\ ",   # cone
    " [~] ",    # boxy
    " (o) ",    # round
    " <_> ",    # v-shape
    " {^} ",    # spiked
    " [..] ",   # monitor
    " .__. ",   # flat
    " /MM\\ ",  # crown
    " (**) ",   # goggles
    " d[ ]b ",  # headphones
    " @__@ ",   # princess
    " <oo> ",   # owl
)

ROBOT_EYES = (
    "|o_o|",  # normal
    "|-.-|",  # sleepy
    "|0_0|",  # wide
    "|X_X|",  # dead
    "|>_<|",  # angry
    "|@_@|",  # dizzy
    "|$_$|",  # money
    "|~_~|",  # winking
    "|O_O|",  # stare
    "|=_|=",  # laser
    "|9_6|",  # crazy
    "|+.+|",  # system mode
)

ROBOT_BODIES = (
    "/[_]\\",   # trapezoid
    " |-| ",    # thin
    " [=] ",    # box
    " /#\\ ",   # pyramid
    " (•) ",    # round
    " |%| ",    # vents
    " <_> ",    # hourglass
    " /|\\ ",   # stick arms
    "-[_]-",    # wide arms
    " (|) ",    # oval
    "=[_]=",    # heavy arms
    " /B\\ ",   # button
)

ROBOT_LEGS = (
    " d b ",    # feet
    " / \\ ",   # stance
    " ||| ",    # tracks
    " _| |_",   # wide
    " (@) ",    # wheel
    " /_\\ ",   # skirt
    " | | ",    # sticks
    " <_> ",    # point
    " _A_ ",    # tripod
    " ( ) ",    # hover
    " J L ",    # boots
    " V V ",    # sharp
)


def generate_ascii(ctx: PatternContext) -> Scene:
    """
    Four-line ASCII robot on the primary color.

    Seed offsets: 0 head, 1 eyes, 2 body, 3 legs.
    """
    seed = ctx.seed
    parts = (
        seed.pick(ROBOT_HEADS, 0),
        seed.pick(ROBOT_EYES, 1),
        seed.pick(ROBOT_BODIES, 2),
        seed.pick(ROBOT_LEGS, 3),
    )
    # Non-breaking spaces keep the art aligned; SVG collapses plain spaces
    lines = tuple(part.replace(" ", NBSP) for part in parts)

    robot = Text(
        x=100,
        y=60,
        lines=lines,
        font=Font("monospace", 28, weight="bold"),
        paint=Paint(fill="white"),
        anchor="middle",
        letter_spacing=2,
        line_height=24,
    )
    return Scene(
        view_box=200,
        elements=(backdrop(200, ctx.color.hex), inset(200, (robot,))),
    )
