# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
Schema definitions for generated vector graphics.

All types in this module are immutable (frozen dataclasses).
Once a document is produced, it cannot be altered.
"""

from hashglyph.schema.vector_document import (
    SCHEMA_VERSION,
    Circle,
    Definition,
    Font,
    GradientStop,
    Group,
    Line,
    LinearGradient,
    NoiseFilter,
    OKLCHColor,
    Paint,
    Path,
    Polygon,
    Primitive,
    RadialGradient,
    Rect,
    RGBColor,
    Scene,
    Text,
    TilePattern,
    Transform,
    VectorDocument,
    definition_from_dict,
    iter_primitives,
    primitive_from_dict,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Colors
    "RGBColor",
    "OKLCHColor",
    # Styling
    "Paint",
    "Transform",
    "Font",
    # Primitives
    "Circle",
    "Rect",
    "Line",
    "Polygon",
    "Path",
    "Text",
    "Group",
    "Primitive",
    "iter_primitives",
    "primitive_from_dict",
    # Definitions
    "GradientStop",
    "LinearGradient",
    "RadialGradient",
    "TilePattern",
    "NoiseFilter",
    "Definition",
    "definition_from_dict",
    # Containers
    "Scene",
    "VectorDocument",
]
