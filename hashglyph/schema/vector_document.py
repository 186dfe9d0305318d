# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""
VectorDocument v1.0: canonical schema for generated graphics.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same input → same document → same bytes
- Size-independent: Geometry lives in a fixed logical viewbox; the requested
  pixel size only appears on the outer envelope
- Serializable: JSON-ready via to_dict(), SVG via to_svg()

Colors:
    RGBColor is the display color (8-bit sRGB). OKLCHColor is the perceptual
    coordinate that generated colors are derived from.

Primitives:
    Circle, Rect, Line, Polygon, Path and Text are drawable. Group is a
    container carrying a Transform. Definitions (gradients, tile patterns,
    noise filters) are referenced from Paint as "url(#id)".
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import ClassVar, Iterator, Optional, Union

from hashglyph.exceptions import MalformedInput


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"


# =============================================================================
# Colors
# =============================================================================

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    A display color as an 8-bit sRGB triplet.

    Attributes:
        r: Red channel (0-255)
        g: Green channel (0-255)
        b: Blue channel (0-255)
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {channel} must be 0-255, got {value}")

    @property
    def hex(self) -> str:
        """Lowercase hex string like "#9754a1"."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def lightness(self) -> float:
        """OKLCH lightness of this color (0.0 = black, 1.0 = white)."""
        from hashglyph.render.colorspace import hex_to_oklch
        return hex_to_oklch(self.hex)[0]

    @classmethod
    def from_hex(cls, value: str) -> RGBColor:
        """
        Parse "#rgb", "#rrggbb" (with or without "#", any case).

        Raises:
            MalformedInput: If the string is not a hex color
        """
        m = _HEX_RE.match(value.strip()) if isinstance(value, str) else None
        if not m:
            raise MalformedInput("color", value, "expected #rgb or #rrggbb")
        digits = m.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "hex": self.hex}


@dataclass(frozen=True, slots=True)
class OKLCHColor:
    """
    A single color in OKLCH color space.

    Attributes:
        L: Lightness (0.0 = black, 1.0 = white)
        C: Chroma (0.0 = neutral gray, typical max ~0.32 for sRGB)
        H: Hue in degrees (0-360), None for achromatic colors
    """
    L: float
    C: float
    H: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate color values are within expected ranges."""
        if not 0.0 <= self.L <= 1.0:
            raise ValueError(f"Lightness must be 0-1, got {self.L}")
        if self.C < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.C}")
        if self.H is not None and not 0.0 <= self.H < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.H}")

    def to_rgb(self) -> RGBColor:
        """Convert to a gamma-encoded, gamut-clamped 8-bit sRGB color."""
        from hashglyph.render.colorspace import oklch_to_rgb8
        r, g, b = oklch_to_rgb8(self.L, self.C, self.H if self.H is not None else 0.0)
        return RGBColor(r, g, b)

    @property
    def hex(self) -> str:
        """Hex string of the converted color."""
        return self.to_rgb().hex

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"L": self.L, "C": self.C, "H": self.H}


# =============================================================================
# Paint and Transforms
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paint:
    """
    Fill/stroke styling shared by every primitive.

    Colors are SVG paint strings: a hex color, a named color, an rgba()
    value or a "url(#id)" reference to a definition.
    """
    fill: Optional[str] = None
    stroke: Optional[str] = None
    stroke_width: Optional[float] = None
    stroke_linecap: Optional[str] = None
    opacity: Optional[float] = None
    blend_mode: Optional[str] = None
    filter: Optional[str] = None

    def __post_init__(self) -> None:
        if self.opacity is not None and not 0.0 <= self.opacity <= 1.0:
            raise ValueError(f"Opacity must be 0-1, got {self.opacity}")

    def to_dict(self) -> dict:
        """Serialize the fields that are set."""
        return {
            name: getattr(self, name)
            for name in self.__slots__
            if getattr(self, name) is not None
        }

    @classmethod
    def from_dict(cls, data: dict) -> Paint:
        """Deserialize from dictionary."""
        return cls(**data)


@dataclass(frozen=True, slots=True)
class Transform:
    """
    A translate/scale/rotate transform, applied in that order.

    Attributes:
        translate: (dx, dy) offset
        scale: Uniform scale factor
        rotate: (angle, cx, cy) rotation in degrees about a center
    """
    translate: Optional[tuple[float, float]] = None
    scale: Optional[float] = None
    rotate: Optional[tuple[float, float, float]] = None

    def to_dict(self) -> dict:
        d: dict = {}
        if self.translate is not None:
            d["translate"] = list(self.translate)
        if self.scale is not None:
            d["scale"] = self.scale
        if self.rotate is not None:
            d["rotate"] = list(self.rotate)
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Transform:
        """Deserialize from dictionary."""
        translate = data.get("translate")
        rotate = data.get("rotate")
        return cls(
            translate=tuple(translate) if translate is not None else None,
            scale=data.get("scale"),
            rotate=tuple(rotate) if rotate is not None else None,
        )


# =============================================================================
# Primitives
# =============================================================================


@dataclass(frozen=True, slots=True)
class Circle:
    kind: ClassVar[str] = "circle"
    cx: float
    cy: float
    r: float
    paint: Paint = field(default_factory=Paint)

    def __post_init__(self) -> None:
        if self.r < 0:
            raise ValueError(f"Radius must be >= 0, got {self.r}")

    def to_dict(self) -> dict:
        return {"kind": self.kind, "cx": self.cx, "cy": self.cy, "r": self.r,
                "paint": self.paint.to_dict()}


@dataclass(frozen=True, slots=True)
class Rect:
    kind: ClassVar[str] = "rect"
    x: float
    y: float
    width: float
    height: float
    paint: Paint = field(default_factory=Paint)
    transform: Optional[Transform] = None

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rect size must be non-negative, got {self.width}x{self.height}"
            )

    def to_dict(self) -> dict:
        d = {"kind": self.kind, "x": self.x, "y": self.y,
             "width": self.width, "height": self.height,
             "paint": self.paint.to_dict()}
        if self.transform is not None:
            d["transform"] = self.transform.to_dict()
        return d


@dataclass(frozen=True, slots=True)
class Line:
    kind: ClassVar[str] = "line"
    x1: float
    y1: float
    x2: float
    y2: float
    paint: Paint = field(default_factory=Paint)

    def to_dict(self) -> dict:
        return {"kind": self.kind, "x1": self.x1, "y1": self.y1,
                "x2": self.x2, "y2": self.y2, "paint": self.paint.to_dict()}


@dataclass(frozen=True, slots=True)
class Polygon:
    kind: ClassVar[str] = "polygon"
    points: tuple[tuple[float, float], ...]
    paint: Paint = field(default_factory=Paint)

    def __post_init__(self) -> None:
        if len(self.points) < 3:
            raise ValueError(f"Polygon needs at least 3 points, got {len(self.points)}")

    def to_dict(self) -> dict:
        return {"kind": self.kind, "points": [list(p) for p in self.points],
                "paint": self.paint.to_dict()}


@dataclass(frozen=True, slots=True)
class Path:
    kind: ClassVar[str] = "path"
    d: str
    paint: Paint = field(default_factory=Paint)

    def to_dict(self) -> dict:
        return {"kind": self.kind, "d": self.d, "paint": self.paint.to_dict()}


@dataclass(frozen=True, slots=True)
class Font:
    """Font settings for a Text primitive."""
    family: str
    size: float
    weight: Optional[str] = None

    def to_dict(self) -> dict:
        d = {"family": self.family, "size": self.size}
        if self.weight is not None:
            d["weight"] = self.weight
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Font:
        """Deserialize from dictionary."""
        return cls(family=data["family"], size=data["size"], weight=data.get("weight"))


@dataclass(frozen=True, slots=True)
class Text:
    """
    A run of text.

    A single line renders as plain text content. Several lines render as
    stacked tspans, each starting at ``x`` and advancing by ``line_height``.
    """
    kind: ClassVar[str] = "text"
    x: float
    y: float
    lines: tuple[str, ...]
    font: Font
    paint: Paint = field(default_factory=Paint)
    anchor: Optional[str] = None
    baseline: Optional[str] = None
    letter_spacing: Optional[float] = None
    line_height: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.lines:
            raise ValueError("Text needs at least one line")
        if len(self.lines) > 1 and self.line_height is None:
            raise ValueError("Multi-line text requires line_height")

    @property
    def content(self) -> str:
        """All lines joined with newlines."""
        return "\n".join(self.lines)

    def to_dict(self) -> dict:
        d = {"kind": self.kind, "x": self.x, "y": self.y,
             "lines": list(self.lines), "font": self.font.to_dict(),
             "paint": self.paint.to_dict()}
        for name in ("anchor", "baseline", "letter_spacing", "line_height"):
            value = getattr(self, name)
            if value is not None:
                d[name] = value
        return d


@dataclass(frozen=True, slots=True)
class Group:
    """A transformed container of primitives."""
    kind: ClassVar[str] = "group"
    children: tuple[Primitive, ...]
    transform: Optional[Transform] = None

    def to_dict(self) -> dict:
        d = {"kind": self.kind, "children": [c.to_dict() for c in self.children]}
        if self.transform is not None:
            d["transform"] = self.transform.to_dict()
        return d


Primitive = Union[Circle, Rect, Line, Polygon, Path, Text, Group]


# =============================================================================
# Definitions
# =============================================================================


@dataclass(frozen=True, slots=True)
class GradientStop:
    """
    A gradient color stop.

    Attributes:
        offset: Position along the gradient in percent (0-100)
        color: Stop color
    """
    offset: float
    color: str

    def __post_init__(self) -> None:
        if not 0.0 <= self.offset <= 100.0:
            raise ValueError(f"Stop offset must be 0-100, got {self.offset}")

    def to_dict(self) -> dict:
        return {"offset": self.offset, "color": self.color}

    @classmethod
    def from_dict(cls, data: dict) -> GradientStop:
        """Deserialize from dictionary."""
        return cls(offset=data["offset"], color=data["color"])


@dataclass(frozen=True, slots=True)
class LinearGradient:
    """Linear gradient; endpoints are in percent of the bounding box."""
    kind: ClassVar[str] = "linearGradient"
    id: str
    stops: tuple[GradientStop, ...]
    x1: float = 0
    y1: float = 0
    x2: float = 100
    y2: float = 100
    rotation: Optional[float] = None

    def to_dict(self) -> dict:
        d = {"kind": self.kind, "id": self.id,
             "stops": [s.to_dict() for s in self.stops],
             "x1": self.x1, "y1": self.y1, "x2": self.x2, "y2": self.y2}
        if self.rotation is not None:
            d["rotation"] = self.rotation
        return d


@dataclass(frozen=True, slots=True)
class RadialGradient:
    """Radial gradient; center and radius are in percent."""
    kind: ClassVar[str] = "radialGradient"
    id: str
    stops: tuple[GradientStop, ...]
    cx: float = 50
    cy: float = 50
    r: float = 50

    def to_dict(self) -> dict:
        return {"kind": self.kind, "id": self.id,
                "stops": [s.to_dict() for s in self.stops],
                "cx": self.cx, "cy": self.cy, "r": self.r}


@dataclass(frozen=True, slots=True)
class TilePattern:
    """A repeating tile of primitives in user space."""
    kind: ClassVar[str] = "pattern"
    id: str
    width: float
    height: float
    children: tuple[Primitive, ...]

    def to_dict(self) -> dict:
        return {"kind": self.kind, "id": self.id, "width": self.width,
                "height": self.height,
                "children": [c.to_dict() for c in self.children]}


@dataclass(frozen=True, slots=True)
class NoiseFilter:
    """Fractal turbulence lit by a distant light, used as a texture overlay."""
    kind: ClassVar[str] = "filter"
    id: str
    base_frequency: float
    octaves: int
    surface_scale: float = 2
    azimuth: float = 45
    elevation: float = 60

    def __post_init__(self) -> None:
        if self.octaves < 1:
            raise ValueError(f"Octaves must be >= 1, got {self.octaves}")

    def to_dict(self) -> dict:
        return {"kind": self.kind, "id": self.id,
                "base_frequency": self.base_frequency, "octaves": self.octaves,
                "surface_scale": self.surface_scale, "azimuth": self.azimuth,
                "elevation": self.elevation}


Definition = Union[LinearGradient, RadialGradient, TilePattern, NoiseFilter]


def iter_primitives(elements: tuple[Primitive, ...]) -> Iterator[Primitive]:
    """Yield primitives depth-first, descending into groups."""
    for element in elements:
        if isinstance(element, Group):
            yield from iter_primitives(element.children)
        else:
            yield element


def _optional_transform(data: dict) -> Optional[Transform]:
    if "transform" not in data:
        return None
    return Transform.from_dict(data["transform"])


def primitive_from_dict(data: dict) -> Primitive:
    """Rebuild a primitive (or group) from its ``to_dict()`` form."""
    kind = data["kind"]
    if kind == Group.kind:
        return Group(
            children=tuple(primitive_from_dict(c) for c in data["children"]),
            transform=_optional_transform(data),
        )

    paint = Paint.from_dict(data["paint"])
    if kind == Circle.kind:
        return Circle(data["cx"], data["cy"], data["r"], paint)
    if kind == Rect.kind:
        return Rect(
            data["x"], data["y"], data["width"], data["height"],
            paint, _optional_transform(data),
        )
    if kind == Line.kind:
        return Line(data["x1"], data["y1"], data["x2"], data["y2"], paint)
    if kind == Polygon.kind:
        return Polygon(tuple((p[0], p[1]) for p in data["points"]), paint)
    if kind == Path.kind:
        return Path(data["d"], paint)
    if kind == Text.kind:
        return Text(
            x=data["x"],
            y=data["y"],
            lines=tuple(data["lines"]),
            font=Font.from_dict(data["font"]),
            paint=paint,
            anchor=data.get("anchor"),
            baseline=data.get("baseline"),
            letter_spacing=data.get("letter_spacing"),
            line_height=data.get("line_height"),
        )
    raise ValueError(f"Unknown primitive kind: {kind!r}")


def definition_from_dict(data: dict) -> Definition:
    """Rebuild a definition from its ``to_dict()`` form."""
    kind = data["kind"]
    if kind == LinearGradient.kind:
        return LinearGradient(
            id=data["id"],
            stops=tuple(GradientStop.from_dict(s) for s in data["stops"]),
            x1=data["x1"],
            y1=data["y1"],
            x2=data["x2"],
            y2=data["y2"],
            rotation=data.get("rotation"),
        )
    if kind == RadialGradient.kind:
        return RadialGradient(
            id=data["id"],
            stops=tuple(GradientStop.from_dict(s) for s in data["stops"]),
            cx=data["cx"],
            cy=data["cy"],
            r=data["r"],
        )
    if kind == TilePattern.kind:
        return TilePattern(
            id=data["id"],
            width=data["width"],
            height=data["height"],
            children=tuple(primitive_from_dict(c) for c in data["children"]),
        )
    if kind == NoiseFilter.kind:
        return NoiseFilter(
            id=data["id"],
            base_frequency=data["base_frequency"],
            octaves=data["octaves"],
            surface_scale=data["surface_scale"],
            azimuth=data["azimuth"],
            elevation=data["elevation"],
        )
    raise ValueError(f"Unknown definition kind: {kind!r}")


# =============================================================================
# Scene and Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Scene:
    """
    The size-independent output of a generator.

    Attributes:
        view_box: Side length of the square logical coordinate space
        elements: Ordered primitives (painted first to last)
        defs: Definitions referenced by the primitives
    """
    view_box: float
    elements: tuple[Primitive, ...]
    defs: tuple[Definition, ...] = ()

    def __post_init__(self) -> None:
        if self.view_box <= 0:
            raise ValueError(f"View box must be positive, got {self.view_box}")


@dataclass(frozen=True, slots=True)
class VectorDocument:
    """
    A complete vector graphic: a Scene placed on a square canvas.

    This is the only externally visible artifact of the engine.

    Attributes:
        size: Output width and height in pixels
        view_box: Side length of the logical coordinate space
        elements: Ordered primitives
        defs: Definitions (gradients, patterns, filters)
        variant: Name of the generator that produced the document
        version: Schema version
    """
    size: int
    view_box: float
    elements: tuple[Primitive, ...]
    defs: tuple[Definition, ...] = ()
    variant: Optional[str] = None
    version: str = field(default=SCHEMA_VERSION)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"Size must be positive, got {self.size}")
        if self.view_box <= 0:
            raise ValueError(f"View box must be positive, got {self.view_box}")

    @classmethod
    def from_scene(
        cls,
        scene: Scene,
        size: int,
        variant: Optional[str] = None,
    ) -> VectorDocument:
        """Wrap a scene in a square canvas of ``size`` pixels."""
        return cls(
            size=size,
            view_box=scene.view_box,
            elements=scene.elements,
            defs=scene.defs,
            variant=variant,
        )

    def primitives(self) -> Iterator[Primitive]:
        """Iterate all drawable primitives, flattening groups."""
        return iter_primitives(self.elements)

    def count(self, kind: str) -> int:
        """Number of primitives of one kind (e.g. "circle", "rect")."""
        return sum(1 for p in self.primitives() if p.kind == kind)

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON output."""
        result = {
            "version": self.version,
            "size": self.size,
            "view_box": self.view_box,
            "defs": [d.to_dict() for d in self.defs],
            "elements": [e.to_dict() for e in self.elements],
        }
        if self.variant is not None:
            result["variant"] = self.variant
        return result

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> VectorDocument:
        """Deserialize from dictionary."""
        return cls(
            size=data["size"],
            view_box=data["view_box"],
            elements=tuple(primitive_from_dict(e) for e in data["elements"]),
            defs=tuple(definition_from_dict(d) for d in data.get("defs", [])),
            variant=data.get("variant"),
            version=data.get("version", SCHEMA_VERSION),
        )

    @classmethod
    def from_json(cls, json_str: str) -> VectorDocument:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))

    def to_svg(self) -> str:
        """Render as an SVG document string."""
        # Import here to avoid circular imports
        from hashglyph.runtime.serializers.svg import to_svg
        return to_svg(self)
