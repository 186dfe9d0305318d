# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Serializers for VectorDocument delivery.

Serializers render a document exactly as built: they never add, drop or
reorder primitives.
"""

from hashglyph.runtime.serializers.base import SerializerFormat, format_number
from hashglyph.runtime.serializers.document import serialize
from hashglyph.runtime.serializers.svg import to_svg

__all__ = [
    "SerializerFormat",
    "format_number",
    "serialize",
    "to_svg",
]
