# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Tests for schema types and their validation."""

import json

import pytest

from hashglyph.exceptions import MalformedInput
from hashglyph.schema import (
    SCHEMA_VERSION,
    Circle,
    Font,
    GradientStop,
    Group,
    LinearGradient,
    NoiseFilter,
    OKLCHColor,
    Paint,
    Polygon,
    Rect,
    RGBColor,
    Scene,
    Text,
    Transform,
    VectorDocument,
)


class TestRGBColor:

    def test_hex_is_lowercase(self):
        assert RGBColor(171, 205, 239).hex == "#abcdef"

    def test_from_hex_six_digits(self):
        assert RGBColor.from_hex("#9754A1") == RGBColor(151, 84, 161)

    def test_from_hex_three_digits(self):
        assert RGBColor.from_hex("#f0a") == RGBColor(255, 0, 170)

    def test_from_hex_without_hash(self):
        assert RGBColor.from_hex("ffffff") == RGBColor(255, 255, 255)

    @pytest.mark.parametrize("value", ["", "#12", "#12345", "#ggg", "red", "#1234567"])
    def test_from_hex_malformed(self, value):
        with pytest.raises(MalformedInput):
            RGBColor.from_hex(value)

    def test_malformed_is_value_error(self):
        with pytest.raises(ValueError):
            RGBColor.from_hex("nope")

    def test_channel_range(self):
        with pytest.raises(ValueError, match="Channel"):
            RGBColor(256, 0, 0)

    def test_lightness(self):
        assert RGBColor(0, 0, 0).lightness == pytest.approx(0.0, abs=0.01)
        assert RGBColor(255, 255, 255).lightness == pytest.approx(1.0, abs=0.01)


class TestOKLCHColor:

    def test_valid_color(self):
        c = OKLCHColor(L=0.5, C=0.1, H=200.0)
        assert (c.L, c.C, c.H) == (0.5, 0.1, 200.0)

    def test_invalid_lightness(self):
        with pytest.raises(ValueError, match="Lightness"):
            OKLCHColor(L=1.5, C=0.1, H=200.0)

    def test_invalid_chroma(self):
        with pytest.raises(ValueError, match="Chroma"):
            OKLCHColor(L=0.5, C=-0.1)

    def test_invalid_hue(self):
        with pytest.raises(ValueError, match="Hue"):
            OKLCHColor(L=0.5, C=0.1, H=400.0)

    def test_to_rgb(self):
        assert OKLCHColor(L=0.0, C=0.0).to_rgb() == RGBColor(0, 0, 0)


class TestPrimitives:

    def test_paint_opacity_range(self):
        with pytest.raises(ValueError, match="Opacity"):
            Paint(fill="#000", opacity=1.5)

    def test_paint_to_dict_skips_unset(self):
        assert Paint(fill="#000", opacity=0.5).to_dict() == {"fill": "#000", "opacity": 0.5}

    def test_negative_radius(self):
        with pytest.raises(ValueError, match="Radius"):
            Circle(0, 0, -1)

    def test_negative_rect(self):
        with pytest.raises(ValueError, match="non-negative"):
            Rect(0, 0, -1, 5)

    def test_polygon_needs_three_points(self):
        with pytest.raises(ValueError, match="3 points"):
            Polygon(((0, 0), (1, 1)))

    def test_multiline_text_needs_line_height(self):
        with pytest.raises(ValueError, match="line_height"):
            Text(0, 0, ("a", "b"), Font("monospace", 10))

    def test_text_content(self):
        t = Text(0, 0, ("a", "b"), Font("monospace", 10), line_height=12)
        assert t.content == "a\nb"

    def test_gradient_stop_range(self):
        with pytest.raises(ValueError, match="offset"):
            GradientStop(120, "#fff")

    def test_noise_octaves(self):
        with pytest.raises(ValueError, match="Octaves"):
            NoiseFilter("n", 0.01, 0)

    def test_kinds(self):
        assert Circle.kind == "circle"
        assert Rect.kind == "rect"
        assert Group.kind == "group"
        assert LinearGradient.kind == "linearGradient"


def _document():
    inner = Group(
        children=(
            Circle(50, 50, 50, Paint(fill="#9754a1")),
            Text(50, 55, ("AM",), Font("Arial", 40), Paint(fill="#ffffff")),
        ),
        transform=Transform(translate=(5, 5), scale=0.9),
    )
    scene = Scene(
        view_box=100,
        elements=(Rect(0, 0, 100, 100, Paint(fill="url(#g)")), inner),
        defs=(LinearGradient("g", (GradientStop(0, "#000"), GradientStop(100, "#fff"))),),
    )
    return VectorDocument.from_scene(scene, 64, "avatar")


class TestVectorDocument:

    def test_from_scene(self):
        doc = _document()
        assert doc.size == 64
        assert doc.view_box == 100
        assert doc.variant == "avatar"
        assert doc.version == SCHEMA_VERSION

    def test_primitives_flatten_groups(self):
        kinds = [p.kind for p in _document().primitives()]
        assert kinds == ["rect", "circle", "text"]

    def test_count(self):
        doc = _document()
        assert doc.count("circle") == 1
        assert doc.count("text") == 1
        assert doc.count("line") == 0

    def test_invalid_size(self):
        with pytest.raises(ValueError, match="Size"):
            VectorDocument(size=0, view_box=100, elements=())

    def test_scene_view_box(self):
        with pytest.raises(ValueError, match="View box"):
            Scene(view_box=0, elements=())

    def test_to_json(self):
        data = json.loads(_document().to_json())
        assert data["version"] == SCHEMA_VERSION
        assert data["variant"] == "avatar"
        assert data["defs"][0]["kind"] == "linearGradient"
        group = data["elements"][1]
        assert group["transform"] == {"translate": [5, 5], "scale": 0.9}
        assert [c["kind"] for c in group["children"]] == ["circle", "text"]

    def test_frozen(self):
        doc = _document()
        with pytest.raises(AttributeError):
            doc.size = 10

    def test_to_svg_delegates(self):
        svg = _document().to_svg()
        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")

    def test_json_roundtrip(self):
        doc = _document()
        assert VectorDocument.from_json(doc.to_json()) == doc

    @pytest.mark.parametrize("variant", ["terminal", "marble", "bauhaus", "constellation"])
    def test_composed_roundtrip(self, variant):
        from hashglyph import compose

        doc = compose(variant, "Alex Morgan", 80)
        assert VectorDocument.from_dict(json.loads(doc.to_json(indent=None))) == doc

    def test_unknown_kind_rejected(self):
        data = _document().to_dict()
        data["elements"][0]["kind"] = "ellipse"
        with pytest.raises(ValueError, match="Unknown primitive kind"):
            VectorDocument.from_dict(data)
