# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
SVG serializer.

Builds an ``svgwrite.Drawing`` from a VectorDocument. Output is
deterministic: every number goes through ``format_number`` before it reaches
svgwrite, svgwrite writes attributes in sorted order, and text content is
stripped of characters XML 1.0 cannot carry, so identical documents always
produce identical, well-formed bytes.

Example::

    <svg baseProfile="full" height="64" version="1.1" viewBox="0 0 100 100" width="64" ...>
      <defs />
      <g transform="translate(5 5) scale(0.9)">
        <circle cx="50" cy="50" fill="#9754a1" r="50" />
        <text dominant-baseline="middle" fill="#ffffff" ... x="50" y="55">AM</text>
      </g>
    </svg>

(shown indented; the serializer emits a single line)
"""

from __future__ import annotations

import re
from typing import Optional

import svgwrite
from svgwrite.base import BaseElement

from hashglyph.runtime.serializers.base import format_number
from hashglyph.schema import (
    Circle,
    Definition,
    Group,
    Line,
    LinearGradient,
    NoiseFilter,
    Paint,
    Path,
    Polygon,
    Primitive,
    RadialGradient,
    Rect,
    Text,
    TilePattern,
    Transform,
    VectorDocument,
)

# Everything outside the XML 1.0 Char production
_XML_INVALID = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def to_svg(document: VectorDocument) -> str:
    """Serialize a VectorDocument as an SVG document string.

    Args:
        document: The document to render.

    Returns:
        SVG markup; ``width``/``height`` carry the pixel size and the
        ``viewBox`` carries the logical coordinate space.
    """
    vb = format_number(document.view_box)
    dwg = svgwrite.Drawing(
        size=(document.size, document.size),
        viewBox=f"0 0 {vb} {vb}",
        debug=False,
    )
    for definition in document.defs:
        dwg.defs.add(_definition(dwg, definition))
    for element in document.elements:
        dwg.add(_primitive(dwg, element))
    return dwg.tostring()


def xml_safe(text: str) -> str:
    """Drop characters that may not appear in an XML document."""
    return _XML_INVALID.sub("", text)


# =============================================================================
# Attributes
# =============================================================================


def _num(value: Optional[float]) -> Optional[str]:
    return None if value is None else format_number(value)


def _percent(value: float) -> str:
    return f"{format_number(value)}%"


def _apply(node: BaseElement, attrs: dict[str, Optional[str]]) -> None:
    """Set attributes on ``node``, skipping unset values."""
    node.update({name: value for name, value in attrs.items() if value is not None})


def _paint(paint: Paint) -> dict[str, Optional[str]]:
    style = None
    if paint.blend_mode is not None:
        style = f"mix-blend-mode: {paint.blend_mode};"
    return {
        "fill": paint.fill,
        "stroke": paint.stroke,
        "stroke-width": _num(paint.stroke_width),
        "stroke-linecap": paint.stroke_linecap,
        "opacity": _num(paint.opacity),
        "filter": paint.filter,
        "style": style,
    }


def _transform(transform: Optional[Transform]) -> Optional[str]:
    if transform is None:
        return None
    ops = []
    if transform.translate is not None:
        dx, dy = transform.translate
        ops.append(f"translate({format_number(dx)} {format_number(dy)})")
    if transform.scale is not None:
        ops.append(f"scale({format_number(transform.scale)})")
    if transform.rotate is not None:
        ops.append("rotate({})".format(
            " ".join(format_number(v) for v in transform.rotate)
        ))
    return " ".join(ops) or None


# =============================================================================
# Primitives
# =============================================================================


def _primitive(dwg: svgwrite.Drawing, element: Primitive) -> BaseElement:
    if isinstance(element, Group):
        group = dwg.g()
        _apply(group, {"transform": _transform(element.transform)})
        for child in element.children:
            group.add(_primitive(dwg, child))
        return group

    if isinstance(element, Text):
        return _text(dwg, element)

    if isinstance(element, Circle):
        node = dwg.circle(
            center=(_num(element.cx), _num(element.cy)), r=_num(element.r),
        )
    elif isinstance(element, Rect):
        node = dwg.rect(
            insert=(_num(element.x), _num(element.y)),
            size=(_num(element.width), _num(element.height)),
        )
        _apply(node, {"transform": _transform(element.transform)})
    elif isinstance(element, Line):
        node = dwg.line(
            start=(_num(element.x1), _num(element.y1)),
            end=(_num(element.x2), _num(element.y2)),
        )
    elif isinstance(element, Polygon):
        node = dwg.polygon(
            points=[(format_number(x), format_number(y)) for x, y in element.points]
        )
    elif isinstance(element, Path):
        node = dwg.path(d=element.d)
    else:
        raise TypeError(f"Unsupported primitive: {type(element).__name__}")

    _apply(node, _paint(element.paint))
    return node


def _text(dwg: svgwrite.Drawing, element: Text) -> BaseElement:
    x, y = _num(element.x), _num(element.y)
    lines = [xml_safe(line) for line in element.lines]

    if len(lines) == 1:
        node = dwg.text(lines[0], insert=(x, y))
    else:
        node = dwg.text("", insert=(x, y))
        # Every line, the first included, advances by one line height
        for line in lines:
            node.add(dwg.tspan(line, x=[x], dy=[_num(element.line_height)]))

    _apply(node, {
        "font-family": element.font.family,
        "font-size": _num(element.font.size),
        "font-weight": element.font.weight,
        "text-anchor": element.anchor,
        "dominant-baseline": element.baseline,
        "letter-spacing": _num(element.letter_spacing),
    })
    _apply(node, _paint(element.paint))
    return node


# =============================================================================
# Definitions
# =============================================================================


def _definition(dwg: svgwrite.Drawing, definition: Definition) -> BaseElement:
    if isinstance(definition, (LinearGradient, RadialGradient)):
        return _gradient(dwg, definition)

    if isinstance(definition, TilePattern):
        pattern = dwg.pattern(
            size=(_num(definition.width), _num(definition.height)),
            id=definition.id,
            patternUnits="userSpaceOnUse",
        )
        for child in definition.children:
            pattern.add(_primitive(dwg, child))
        return pattern

    if isinstance(definition, NoiseFilter):
        noise = dwg.filter(id=definition.id)
        noise.feTurbulence(
            type="fractalNoise",
            baseFrequency=format_number(definition.base_frequency),
            numOctaves=format_number(definition.octaves),
            result="noise",
        )
        lighting = noise.feDiffuseLighting(
            in_="noise",
            lighting_color="white",
            surfaceScale=format_number(definition.surface_scale),
        )
        lighting.feDistantLight(
            format_number(definition.azimuth),
            format_number(definition.elevation),
            factory=lighting,
        )
        return noise

    raise TypeError(f"Unsupported definition: {type(definition).__name__}")


def _gradient(
    dwg: svgwrite.Drawing,
    definition: LinearGradient | RadialGradient,
) -> BaseElement:
    if isinstance(definition, LinearGradient):
        gradient = dwg.linearGradient(
            start=(_percent(definition.x1), _percent(definition.y1)),
            end=(_percent(definition.x2), _percent(definition.y2)),
            id=definition.id,
        )
        if definition.rotation is not None:
            gradient["gradientTransform"] = (
                f"rotate({format_number(definition.rotation)} 0.5 0.5)"
            )
    else:
        gradient = dwg.radialGradient(
            center=(_percent(definition.cx), _percent(definition.cy)),
            r=_percent(definition.r),
            id=definition.id,
        )
    for stop in definition.stops:
        gradient.add_stop_color(_percent(stop.offset), stop.color)
    return gradient
