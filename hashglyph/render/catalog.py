# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Bundled constellation catalog.

The catalog is a GeoJSON FeatureCollection of MultiLineString features
(star-to-star lines in right ascension / declination degrees). It is parsed
once per process and handed to generators as an immutable tuple.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from typing import Sequence

logger = logging.getLogger(__name__)

CATALOG_RESOURCE = "constellations.json"

Point = tuple[float, float]
Polyline = tuple[Point, ...]


@dataclass(frozen=True, slots=True)
class Constellation:
    """
    One named star-line figure.

    Attributes:
        id: Short identifier (IAU abbreviation)
        name: Display name
        lines: Polylines in source coordinates
    """
    id: str
    name: str
    lines: tuple[Polyline, ...]


def parse_catalog(data: dict) -> tuple[Constellation, ...]:
    """
    Build constellations from a GeoJSON FeatureCollection.

    LineString and MultiLineString geometries are accepted; other features
    are skipped.

    Raises:
        ValueError: If no usable feature is found
    """
    entries = []
    for feature in data.get("features", []):
        geometry = feature.get("geometry") or {}
        kind = geometry.get("type")
        coords = geometry.get("coordinates") or []
        if kind == "LineString":
            coords = [coords]
        elif kind != "MultiLineString":
            continue
        lines = tuple(
            tuple((float(p[0]), float(p[1])) for p in line)
            for line in coords
            if line
        )
        if not lines:
            continue
        props = feature.get("properties") or {}
        entries.append(Constellation(
            id=str(feature.get("id", "")),
            name=str(props.get("name", feature.get("id", ""))),
            lines=lines,
        ))
    if not entries:
        raise ValueError("Constellation catalog contains no line features")
    return tuple(entries)


@lru_cache(maxsize=1)
def load_catalog() -> tuple[Constellation, ...]:
    """Load the bundled catalog (cached for the life of the process)."""
    raw = resources.files("hashglyph.data").joinpath(CATALOG_RESOURCE).read_text(
        encoding="utf-8"
    )
    catalog = parse_catalog(json.loads(raw))
    logger.info("Loaded %d constellations", len(catalog))
    return catalog


def normalize_lines(
    lines: Sequence[Sequence[Point]],
    canvas: float = 100.0,
    extent: float = 60.0,
) -> tuple[Polyline, ...]:
    """
    Fit polylines into a square canvas.

    Computes the bounding box, scales isotropically so the larger side spans
    ``extent`` units, centers the figure and flips the vertical axis so
    source "up" stays up on screen. A zero-width or zero-height bounding box
    is treated as one unit wide for scaling, so a single point or a straight
    vertical/horizontal line never divides by zero and lands centered.

    Args:
        lines: Polylines in any coordinate system
        canvas: Side of the target square
        extent: Largest side of the fitted figure

    Returns:
        Polylines in canvas coordinates
    """
    points = [p for line in lines for p in line]
    if not points:
        return ()

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)

    width = max_x - min_x
    height = max_y - min_y
    scale = min(extent / (width or 1.0), extent / (height or 1.0))

    offset_x = (canvas - width * scale) / 2.0
    offset_y = (canvas - height * scale) / 2.0

    return tuple(
        tuple(
            (
                (x - min_x) * scale + offset_x,
                canvas - ((y - min_y) * scale + offset_y),
            )
            for x, y in line
        )
        for line in lines
    )
