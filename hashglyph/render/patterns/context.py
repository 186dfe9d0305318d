# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Inputs shared by every pattern generator, plus small layout helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

from hashglyph.render.catalog import Constellation
from hashglyph.render.seed import Seed
from hashglyph.schema import Group, Paint, Primitive, Rect, RGBColor, Scene, Transform


@dataclass(frozen=True, slots=True)
class PatternContext:
    """
    Everything a generator may read.

    Attributes:
        name: The input text (initials come from here)
        seed: Seed derived from ``name``
        size: Requested output size in pixels; generators draw in their own
            viewbox and normally ignore it
        color: Resolved primary color (explicit or derived)
        catalog: Read-only constellation catalog
    """
    name: str
    seed: Seed
    size: int
    color: RGBColor
    catalog: tuple[Constellation, ...] = ()


Generator = Callable[[PatternContext], Scene]


def backdrop(view_box: float, fill: str) -> Rect:
    """A rectangle covering the whole canvas."""
    return Rect(0, 0, view_box, view_box, Paint(fill=fill))


def inset(
    view_box: float,
    children: Iterable[Primitive],
    scale: float = 0.9,
    offset: tuple[float, float] | None = None,
) -> Group:
    """
    Shrink content toward the center, leaving an even margin.

    By default the offset is half the freed space on each axis, so a 100
    unit viewbox at scale 0.9 is translated by (5, 5).
    """
    if offset is None:
        margin = round(view_box * (1 - scale) / 2, 4)
        offset = (margin, margin)
    return Group(
        children=tuple(children),
        transform=Transform(translate=offset, scale=scale),
    )
