# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Format dispatch for VectorDocument delivery.

SVG is the primary artifact; JSON exposes the same primitive tree for
callers that post-process documents (tests, caches, other renderers).
"""

from __future__ import annotations

import json

from hashglyph.runtime.serializers.base import SerializerFormat
from hashglyph.runtime.serializers.svg import to_svg
from hashglyph.schema import VectorDocument


def serialize(
    document: VectorDocument,
    format: SerializerFormat = SerializerFormat.SVG,
) -> str:
    """Serialize a VectorDocument.

    Args:
        document: The document to serialize.
        format: SVG, compact JSON, or indented JSON.

    Returns:
        Serialized string.
    """
    if format == SerializerFormat.SVG:
        return to_svg(document)
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(document.to_dict(), indent=2)
    return json.dumps(document.to_dict(), separators=(",", ":"))
