# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Composition entry point.

Takes a variant name and an input string and returns a finished
VectorDocument. Pattern variants are pure; the ``portrait`` variant is the
only one that performs I/O (a single image fetch).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Optional

import httpx

from hashglyph.exceptions import InvalidVariant, SourceFetchFailure
from hashglyph.render.catalog import load_catalog
from hashglyph.render.color import resolve_color
from hashglyph.render.dither import DitherConfig, RasterSample, vectorize
from hashglyph.render.fetch import FetchConfig, fetch_raster
from hashglyph.render.patterns import (
    Generator,
    PatternContext,
    generate_ascii,
    generate_avatar,
    generate_bauhaus,
    generate_beam,
    generate_circuit,
    generate_constellation,
    generate_dither,
    generate_dotmatrix,
    generate_glitch,
    generate_gravatar,
    generate_marble,
    generate_pixel,
    generate_ring,
    generate_smile,
    generate_sunset,
    generate_terminal,
)
from hashglyph.render.seed import derive_seed
from hashglyph.schema import VectorDocument

logger = logging.getLogger(__name__)

VARIANTS: MappingProxyType[str, Generator] = MappingProxyType({
    "avatar": generate_avatar,
    "gravatar": generate_gravatar,
    "dither": generate_dither,
    "ascii": generate_ascii,
    "dotmatrix": generate_dotmatrix,
    "terminal": generate_terminal,
    "bauhaus": generate_bauhaus,
    "ring": generate_ring,
    "beam": generate_beam,
    "marble": generate_marble,
    "glitch": generate_glitch,
    "sunset": generate_sunset,
    "smile": generate_smile,
    "circuit": generate_circuit,
    "pixel": generate_pixel,
    "constellation": generate_constellation,
})

PORTRAIT = "portrait"

DEFAULT_SIZE = 100


@dataclass(frozen=True)
class ComposeConfig:
    """Configuration for document composition."""

    # Output sizes outside [min_size, max_size] are clamped
    min_size: int = 16
    max_size: int = 2048

    # Logical canvas side for the portrait variant
    portrait_canvas: int = 256

    dither: DitherConfig = field(default_factory=DitherConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)

    def __post_init__(self) -> None:
        if self.min_size < 1:
            raise ValueError(f"min_size must be >= 1, got {self.min_size}")
        if self.max_size < self.min_size:
            raise ValueError(
                f"max_size ({self.max_size}) must be >= min_size ({self.min_size})"
            )
        if self.portrait_canvas < 1:
            raise ValueError(
                f"portrait_canvas must be >= 1, got {self.portrait_canvas}"
            )

    def clamp_size(self, size: int) -> int:
        """Bring ``size`` into the configured range."""
        clamped = min(max(int(size), self.min_size), self.max_size)
        if clamped != size:
            logger.warning("Clamped size %s to %d", size, clamped)
        return clamped


def available_variants() -> tuple[str, ...]:
    """All accepted variant names, sorted, including ``portrait``."""
    return tuple(sorted([*VARIANTS, PORTRAIT]))


def compose(
    variant: str,
    text: str,
    size: int = DEFAULT_SIZE,
    color: Optional[str] = None,
    *,
    image_url: Optional[str] = None,
    client: Optional[httpx.Client] = None,
    config: Optional[ComposeConfig] = None,
) -> VectorDocument:
    """
    Generate a vector graphic.

    Args:
        variant: Pattern name (see ``available_variants()``)
        text: Input name; the seed, the initials and the derived color all
            come from it
        size: Output width and height in pixels
        color: Optional "#rgb" / "#rrggbb" override for the primary color.
            Malformed values are ignored in favour of the derived color.
        image_url: Source image for ``portrait``; ``text`` is used as the
            URL when omitted
        client: httpx client to reuse for the portrait fetch
        config: Composition settings (uses defaults if None)

    Returns:
        VectorDocument of ``size`` x ``size`` pixels

    Raises:
        InvalidVariant: If ``variant`` is not a known name
    """
    cfg = config or ComposeConfig()
    if variant != PORTRAIT and variant not in VARIANTS:
        raise InvalidVariant(variant, available_variants())

    size = cfg.clamp_size(size)
    seed = derive_seed(text)
    primary = resolve_color(color, seed)
    logger.debug("Composing %s for %r at %dpx", variant, text, size)

    if variant == PORTRAIT:
        dither = replace(cfg.dither, primary=primary.hex)
        image = _load_portrait(image_url or text, cfg.fetch, client)
        scene = vectorize(image, cfg.portrait_canvas, cfg.portrait_canvas, dither)
        return VectorDocument.from_scene(scene, size, variant)

    ctx = PatternContext(
        name=text,
        seed=seed,
        size=size,
        color=primary,
        catalog=load_catalog() if variant == "constellation" else (),
    )
    scene = VARIANTS[variant](ctx)
    return VectorDocument.from_scene(scene, size, variant)


def _load_portrait(
    url: str,
    config: FetchConfig,
    client: Optional[httpx.Client],
) -> Optional[RasterSample]:
    """Fetch the portrait source; None when it cannot be loaded."""
    try:
        return fetch_raster(url, config, client)
    except SourceFetchFailure as e:
        logger.warning(
            "Portrait source unavailable, rendering background only: %s",
            e.message,
        )
        return None
