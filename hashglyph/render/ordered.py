# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Ordered dithering primitives shared by the plasma generator and the raster
vectorizer.

The 4x4 Bayer matrix spreads thresholds 0-15 so that neighbouring cells
never share similar levels, which binarizes smooth gradients without
visible banding. Both code paths normalize against the same base.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

BAYER_4X4 = np.array([
    [0, 8, 2, 10],
    [12, 4, 14, 6],
    [3, 11, 1, 9],
    [15, 7, 13, 5],
], dtype=np.float64)
BAYER_4X4.setflags(write=False)

# Number of dithering levels; thresholds are BAYER_4X4 / DITHER_LEVELS
DITHER_LEVELS = 16.0

# (start_cell, length_cells) within one row
DitherRun = tuple[int, int]


def threshold_map(rows: int, cols: int) -> NDArray[np.float64]:
    """
    Tile the normalized matrix over a rows x cols cell grid.

    Cell (r, c) gets BAYER_4X4[r mod 4, c mod 4] / DITHER_LEVELS, a
    threshold in [0, 1).
    """
    r = np.arange(rows) % 4
    c = np.arange(cols) % 4
    return BAYER_4X4[r[:, None], c[None, :]] / DITHER_LEVELS


def row_runs(active: NDArray[np.bool_]) -> list[DitherRun]:
    """
    Collapse one row of active/inactive cells into runs.

    A run opens when an active cell follows an inactive one (or the row
    start) and closes when an inactive cell or the row end is reached.

    Args:
        active: 1-D boolean array for one row

    Returns:
        List of (start_cell, length_cells), left to right. Empty when no
        cell is active.

    Example:
        >>> row_runs(np.array([True, True, False, True]))
        [(0, 2), (3, 1)]
    """
    bits = np.asarray(active, dtype=np.int8).ravel()
    edges = np.diff(np.concatenate(([0], bits, [0])))
    starts = np.flatnonzero(edges == 1)
    ends = np.flatnonzero(edges == -1)
    return [(int(s), int(e - s)) for s, e in zip(starts, ends)]
