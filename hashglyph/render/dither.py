# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Raster-to-vector conversion by ordered dithering.

The image is sampled on a coarse cell grid, contrast/brightness adjusted,
reduced to luminance and binarized against the Bayer matrix. Each row's
active cells are then merged into horizontal runs so a 256x256 canvas costs
a few thousand rectangles rather than tens of thousands.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from hashglyph.render.ordered import row_runs, threshold_map
from hashglyph.schema import Paint, Primitive, Rect, RGBColor, Scene

logger = logging.getLogger(__name__)

# ITU-R BT.601 luma weights
LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)


@dataclass(frozen=True)
class DitherConfig:
    """Configuration for raster dithering."""

    # Cell size in canvas units; 1 samples every logical pixel
    grid_size: int = 1

    # Linear contrast around mid-gray (1.0 = unchanged)
    contrast: float = 1.2

    # Offset added to every channel, as a fraction of full scale
    brightness: float = 0.05

    # Color of active cells
    primary: str = "#f5f5f5"

    # Background painted once behind the runs
    secondary: str = "#11011D"

    def __post_init__(self) -> None:
        if self.grid_size < 1:
            raise ValueError(f"Grid size must be >= 1, got {self.grid_size}")
        if self.contrast < 0:
            raise ValueError(f"Contrast must be >= 0, got {self.contrast}")
        # Fail early on unusable colors
        RGBColor.from_hex(self.primary)
        RGBColor.from_hex(self.secondary)


@dataclass(frozen=True, eq=False)
class RasterSample:
    """
    A decoded raster image.

    Attributes:
        pixels: Array of shape (H, W, 3) with uint8 sRGB values
    """
    pixels: NDArray[np.uint8]

    def __post_init__(self) -> None:
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 3:
            raise ValueError(
                f"Expected (H, W, 3) array, got shape {self.pixels.shape}"
            )
        if self.pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {self.pixels.dtype}")
        if self.pixels.shape[0] < 1 or self.pixels.shape[1] < 1:
            raise ValueError("Raster must have at least one pixel")

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])


def active_cells(
    image: RasterSample,
    width: int,
    height: int,
    config: DitherConfig,
) -> NDArray[np.bool_]:
    """
    Binarize an image onto the cell grid.

    Args:
        image: Source raster
        width: Target canvas width in logical units
        height: Target canvas height in logical units
        config: Dithering settings

    Returns:
        Boolean array of shape (ceil(height / grid), ceil(width / grid)),
        True where luminance >= the local Bayer threshold
    """
    grid = config.grid_size
    xs = np.arange(0, width, grid, dtype=np.float64)
    ys = np.arange(0, height, grid, dtype=np.float64)

    # Nearest-neighbour: proportional mapping into source space, no filtering
    src_x = np.floor((xs / width) * image.width).astype(np.intp)
    src_y = np.floor((ys / height) * image.height).astype(np.intp)
    samples = image.pixels[src_y[:, None], src_x[None, :]].astype(np.float64)

    adjusted = np.clip(
        (samples - 128.0) * config.contrast + 128.0 + config.brightness * 255.0,
        0.0,
        255.0,
    )
    luminance = (adjusted @ LUMA_WEIGHTS) / 255.0

    return luminance >= threshold_map(len(ys), len(xs))


def run_rects(
    active: NDArray[np.bool_],
    width: int,
    height: int,
    grid_size: int,
    fill: str,
) -> list[Primitive]:
    """
    One rectangle per run of active cells, clipped to the canvas.

    Inactive cells produce nothing; a row without active cells adds no
    primitives.
    """
    paint = Paint(fill=fill)
    rects: list[Primitive] = []
    for row_index, row in enumerate(active):
        y = row_index * grid_size
        cell_height = min(grid_size, height - y)
        for start, length in row_runs(row):
            x = start * grid_size
            rects.append(Rect(
                x=x,
                y=y,
                width=min(length * grid_size, width - x),
                height=cell_height,
                paint=paint,
            ))
    return rects


def vectorize(
    image: Optional[RasterSample],
    width: int,
    height: int,
    config: Optional[DitherConfig] = None,
) -> Scene:
    """
    Convert a raster into a background plus run-length rectangles.

    Args:
        image: Decoded source, or None when it could not be loaded
        width: Target canvas width in logical units
        height: Target canvas height in logical units
        config: Dithering settings (uses defaults if None)

    Returns:
        Scene whose first element is the full-canvas background. With no
        image, the background is the only element.
    """
    if width < 1 or height < 1:
        raise ValueError(f"Canvas must be at least 1x1, got {width}x{height}")

    cfg = config or DitherConfig()
    background = Rect(0, 0, width, height, Paint(fill=cfg.secondary))

    if image is None:
        return Scene(view_box=max(width, height), elements=(background,))

    active = active_cells(image, width, height, cfg)
    runs = run_rects(active, width, height, cfg.grid_size, cfg.primary)
    logger.debug(
        "Dithered %dx%d source onto %dx%d cells: %d runs",
        image.width, image.height, active.shape[1], active.shape[0], len(runs),
    )
    return Scene(view_box=max(width, height), elements=(background, *runs))
