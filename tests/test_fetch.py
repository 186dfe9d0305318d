# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Tests for source image fetching and decoding (network mocked)."""

import io

import httpx
import numpy as np
import pytest
from PIL import Image

from hashglyph.exceptions import SourceFetchFailure
from hashglyph.render.fetch import (
    FetchConfig,
    build_client,
    decode_raster,
    fetch_raster,
)

URL = "https://images.example.com/portrait.png"


def _png_bytes(color=(200, 30, 60), size=(4, 3), mode="RGB"):
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format="PNG")
    return buf.getvalue()


def _client(handler):
    return httpx.Client(transport=httpx.MockTransport(handler))


class TestFetchRaster:

    def test_decodes_png(self):
        body = _png_bytes()
        with _client(lambda request: httpx.Response(200, content=body)) as client:
            sample = fetch_raster(URL, client=client)
        assert (sample.width, sample.height) == (4, 3)
        np.testing.assert_array_equal(sample.pixels[0, 0], [200, 30, 60])

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as client:
            with pytest.raises(SourceFetchFailure, match="ConnectError"):
                fetch_raster(URL, client=client)

    def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with _client(handler) as client:
            with pytest.raises(SourceFetchFailure):
                fetch_raster(URL, client=client)

    def test_http_status(self):
        with _client(lambda request: httpx.Response(404)) as client:
            with pytest.raises(SourceFetchFailure, match="HTTP 404"):
                fetch_raster(URL, client=client)

    def test_undecodable_body(self):
        with _client(lambda request: httpx.Response(200, content=b"not an image")) as client:
            with pytest.raises(SourceFetchFailure, match="undecodable"):
                fetch_raster(URL, client=client)

    def test_oversize_body(self):
        body = _png_bytes(size=(64, 64))
        cfg = FetchConfig(max_bytes=32)
        with _client(lambda request: httpx.Response(200, content=body)) as client:
            with pytest.raises(SourceFetchFailure, match="exceeds"):
                fetch_raster(URL, cfg, client)

    def test_failure_carries_url(self):
        with _client(lambda request: httpx.Response(500)) as client:
            with pytest.raises(SourceFetchFailure) as info:
                fetch_raster(URL, client=client)
        assert info.value.url == URL
        assert info.value.context == {"url": URL}

    @pytest.mark.parametrize("url", ["http://[::1", "Ada Lovelace"])
    def test_unusable_url(self, url):
        with _client(lambda request: httpx.Response(200)) as client:
            with pytest.raises(SourceFetchFailure) as info:
                fetch_raster(url, client=client)
        assert info.value.url == url


class TestDecodeRaster:

    def test_grayscale_converted_to_rgb(self):
        sample = decode_raster(_png_bytes(color=128, mode="L"))
        assert sample.pixels.shape == (3, 4, 3)
        np.testing.assert_array_equal(sample.pixels[1, 1], [128, 128, 128])

    def test_transparency_composited_on_black(self):
        sample = decode_raster(_png_bytes(color=(255, 255, 255, 0), mode="RGBA"))
        np.testing.assert_array_equal(sample.pixels[0, 0], [0, 0, 0])

    def test_opaque_alpha_kept(self):
        sample = decode_raster(_png_bytes(color=(10, 20, 30, 255), mode="RGBA"))
        np.testing.assert_array_equal(sample.pixels[0, 0], [10, 20, 30])

    def test_garbage(self):
        with pytest.raises(SourceFetchFailure):
            decode_raster(b"\x00\x01\x02", "memory")


class TestFetchConfig:

    def test_defaults(self):
        cfg = FetchConfig()
        assert cfg.timeout == 10.0
        assert cfg.max_bytes == 8 * 1024 * 1024

    def test_invalid_timeout(self):
        with pytest.raises(ValueError, match="Timeout"):
            FetchConfig(timeout=0)

    def test_client_headers(self):
        with build_client(FetchConfig(user_agent="tests/0")) as client:
            assert client.headers["User-Agent"] == "tests/0"
            assert client.follow_redirects is True
