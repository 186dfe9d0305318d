# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Delivery runtime for hashglyph.

Turns VectorDocuments into transportable text: SVG markup for display,
JSON for inspection and caching.
"""

from hashglyph.runtime.serializers import SerializerFormat, serialize, to_svg

__all__ = [
    "serialize",
    "to_svg",
    "SerializerFormat",
]
