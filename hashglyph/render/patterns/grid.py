# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Cell-grid variants: mirrored identicon and dithered plasma."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from hashglyph.render.ordered import row_runs, threshold_map
from hashglyph.render.patterns.context import PatternContext, backdrop, inset
from hashglyph.render.seed import Seed
from hashglyph.schema import Paint, Primitive, Rect, Scene

BACKGROUND = "#11011D"

IDENTICON_GRID = 5
IDENTICON_CELL = 50


def generate_gravatar(ctx: PatternContext) -> Scene:
    """
    5x5 identicon, mirrored left to right.

    Only columns 0-2 are read from the seed; cell (col, row) is on when
    ``seed[col * 5 + row]`` is even. Columns 0 and 1 are copied to 4 and 3.
    """
    paint = Paint(fill=ctx.color.hex)
    cells: list[Primitive] = []
    for col in range(3):
        for row in range(IDENTICON_GRID):
            if ctx.seed[col * IDENTICON_GRID + row] % 2:
                continue
            y = row * IDENTICON_CELL
            cells.append(Rect(
                col * IDENTICON_CELL, y, IDENTICON_CELL, IDENTICON_CELL, paint,
            ))
            if col < 2:
                mirror = (IDENTICON_GRID - 1 - col) * IDENTICON_CELL
                cells.append(Rect(
                    mirror, y, IDENTICON_CELL, IDENTICON_CELL, paint,
                ))

    return Scene(
        view_box=250,
        elements=(
            backdrop(250, BACKGROUND),
            inset(250, cells, scale=0.8, offset=(20, 10)),
        ),
    )


PLASMA_CELLS = 32
PLASMA_CELL_SIZE = 10


def plasma_field(seed: Seed, cols: int, rows: int) -> NDArray[np.float64]:
    """
    Smooth interference field in [0, 1] sampled on a cols x rows grid.

    Seed offsets: 0 horizontal phase, 1 vertical phase, 2 frequency.
    """
    phase_x = seed[0] / 10.0
    phase_y = seed[1] / 10.0
    freq = 3.0 + seed.draw(2, 5)

    u = (np.arange(cols, dtype=np.float64) / cols)[None, :]
    v = (np.arange(rows, dtype=np.float64) / rows)[:, None]
    value = (
        np.sin(u * freq + phase_x)
        + np.cos(v * freq + phase_y)
        + np.sin((u + v) * freq)
    )
    return (value + 3.0) / 6.0


def generate_dither(ctx: PatternContext) -> Scene:
    """Seeded plasma binarized with the Bayer matrix, one rect per run."""
    field = plasma_field(ctx.seed, PLASMA_CELLS, PLASMA_CELLS)
    filled = field > threshold_map(PLASMA_CELLS, PLASMA_CELLS)

    paint = Paint(fill=ctx.color.hex)
    runs: list[Primitive] = []
    for row_index, row in enumerate(filled):
        y = row_index * PLASMA_CELL_SIZE
        for start, length in row_runs(row):
            runs.append(Rect(
                start * PLASMA_CELL_SIZE,
                y,
                length * PLASMA_CELL_SIZE,
                PLASMA_CELL_SIZE,
                paint,
            ))

    return Scene(
        view_box=320,
        elements=(backdrop(320, BACKGROUND), inset(320, runs)),
    )
