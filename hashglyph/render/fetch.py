# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Source image loading for the portrait (dithered raster) variant.

One bounded GET, no retries. Any failure (network, HTTP status, oversize
body, undecodable bytes) raises SourceFetchFailure; the composer turns that
into a background-only portrait.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Optional

import httpx
import numpy as np
from PIL import Image, ImageCms, UnidentifiedImageError

from hashglyph.exceptions import SourceFetchFailure
from hashglyph.render.dither import RasterSample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchConfig:
    """Configuration for source image fetches."""

    # Whole-request timeout in seconds
    timeout: float = 10.0

    # Largest accepted response body
    max_bytes: int = 8 * 1024 * 1024

    user_agent: str = "hashglyph/1.0"

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")
        if self.max_bytes <= 0:
            raise ValueError(f"max_bytes must be positive, got {self.max_bytes}")


def build_client(config: Optional[FetchConfig] = None) -> httpx.Client:
    """Create an ``httpx.Client`` with the configured timeout and headers."""
    cfg = config or FetchConfig()
    return httpx.Client(
        timeout=httpx.Timeout(cfg.timeout),
        follow_redirects=True,
        headers={"User-Agent": cfg.user_agent, "Accept": "image/*"},
    )


def fetch_raster(
    url: str,
    config: Optional[FetchConfig] = None,
    client: Optional[httpx.Client] = None,
) -> RasterSample:
    """
    Download and decode an image.

    Args:
        url: Absolute http(s) URL
        config: Fetch settings (uses defaults if None)
        client: Client to reuse; a short-lived one is built when None

    Raises:
        SourceFetchFailure: On any network, HTTP, size or decode problem
    """
    cfg = config or FetchConfig()
    if client is None:
        with build_client(cfg) as own_client:
            data = _download(own_client, url, cfg)
    else:
        data = _download(client, url, cfg)
    return decode_raster(data, url)


def _download(client: httpx.Client, url: str, cfg: FetchConfig) -> bytes:
    """Stream the body, stopping once it exceeds max_bytes."""
    try:
        with client.stream("GET", url, timeout=cfg.timeout) as response:
            response.raise_for_status()
            buffer = bytearray()
            for chunk in response.iter_bytes():
                buffer.extend(chunk)
                if len(buffer) > cfg.max_bytes:
                    raise SourceFetchFailure(
                        url, f"body exceeds {cfg.max_bytes} bytes"
                    )
    except httpx.HTTPStatusError as e:
        raise SourceFetchFailure(url, f"HTTP {e.response.status_code}") from e
    except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
        raise SourceFetchFailure(url, f"{type(e).__name__}: {e}") from e

    logger.debug("Fetched %d bytes from %s", len(buffer), url)
    return bytes(buffer)


def decode_raster(data: bytes, source: str = "<bytes>") -> RasterSample:
    """
    Decode image bytes into an sRGB RasterSample.

    Embedded ICC profiles are converted to sRGB. Transparent pixels are
    composited onto black.

    Raises:
        SourceFetchFailure: If Pillow cannot decode the data
    """
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise SourceFetchFailure(source, f"undecodable image: {e}") from e

    if "A" in img.getbands() or img.mode == "P":
        rgba = img.convert("RGBA")
        backdrop = Image.new("RGBA", rgba.size, (0, 0, 0, 255))
        img = Image.alpha_composite(backdrop, rgba).convert("RGB")
    elif 'icc_profile' in img.info:
        try:
            embedded_profile = ImageCms.ImageCmsProfile(
                io.BytesIO(img.info['icc_profile'])
            )
            srgb_profile = ImageCms.createProfile('sRGB')
            if img.mode != "RGB":
                img = img.convert("RGB")
            img = ImageCms.profileToProfile(img, embedded_profile, srgb_profile)
        except (ImageCms.PyCMSError, OSError):
            # Unusable profile: fall back to simple RGB conversion
            logger.debug("Ignoring unusable ICC profile in %s", source)
            if img.mode != "RGB":
                img = img.convert("RGB")
    elif img.mode != "RGB":
        img = img.convert("RGB")

    return RasterSample(np.array(img, dtype=np.uint8))
