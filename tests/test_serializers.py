# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Tests for SVG and JSON serializers."""

import json
import xml.etree.ElementTree as ET

import pytest

from hashglyph import compose
from hashglyph.render.compose import VARIANTS
from hashglyph.runtime.serializers import (
    SerializerFormat,
    format_number,
    serialize,
    to_svg,
)
from hashglyph.schema import (
    Circle,
    Font,
    GradientStop,
    Group,
    LinearGradient,
    NoiseFilter,
    Paint,
    Polygon,
    Rect,
    Scene,
    Text,
    TilePattern,
    Transform,
    VectorDocument,
)

NS = "{http://www.w3.org/2000/svg}"


def _doc(elements, defs=(), size=64, view_box=100):
    return VectorDocument.from_scene(Scene(view_box, tuple(elements), tuple(defs)), size)


class TestFormatNumber:

    @pytest.mark.parametrize("value, expected", [
        (5, "5"),
        (5.0, "5"),
        (0.9, "0.9"),
        (4.999999999999999, "5"),
        (1 / 3, "0.3333"),
        (-0.0, "0"),
        (-0.00001, "0"),
        (-2.5, "-2.5"),
        (0.0118, "0.0118"),
    ])
    def test_formatting(self, value, expected):
        assert format_number(value) == expected


class TestToSVG:

    def test_envelope(self):
        root = ET.fromstring(to_svg(_doc([], size=48, view_box=250)))
        assert root.tag == f"{NS}svg"
        assert root.get("width") == "48"
        assert root.get("height") == "48"
        assert root.get("viewBox") == "0 0 250 250"

    def test_circle_and_paint(self):
        svg = to_svg(_doc([Circle(50, 50, 45, Paint(fill="#fff", opacity=0.2))]))
        assert '<circle cx="50" cy="50" fill="#fff" opacity="0.2" r="45" />' in svg

    def test_group_transform(self):
        group = Group((Rect(0, 0, 10, 10),), Transform(translate=(5, 5), scale=0.9))
        assert '<g transform="translate(5 5) scale(0.9)">' in to_svg(_doc([group]))

    def test_rect_rotation(self):
        rect = Rect(10, 10, 20, 20, Paint(fill="#000"), Transform(rotate=(45, 20, 20)))
        assert 'transform="rotate(45 20 20)"' in to_svg(_doc([rect]))

    def test_polygon_points(self):
        svg = to_svg(_doc([Polygon(((50, 10), (10, 90), (90, 90)))]))
        assert 'points="50,10 10,90 90,90"' in svg

    def test_blend_mode_style(self):
        svg = to_svg(_doc([Rect(0, 0, 1, 1, Paint(fill="red", blend_mode="screen"))]))
        assert 'style="mix-blend-mode: screen;"' in svg

    def test_text_is_escaped(self):
        text = Text(0, 0, ("<A&B>",), Font('Say "hi"', 10))
        svg = to_svg(_doc([text]))
        assert ">&lt;A&amp;B&gt;</text>" in svg
        assert 'font-family="Say &quot;hi&quot;"' in svg
        ET.fromstring(svg)

    def test_multiline_text_tspans(self):
        text = Text(100, 60, ("ab", "cd"), Font("monospace", 28), line_height=24)
        root = ET.fromstring(to_svg(_doc([text])))
        tspans = root.findall(f".//{NS}tspan")
        assert [t.text for t in tspans] == ["ab", "cd"]
        assert all(t.get("dy") == "24" and t.get("x") == "100" for t in tspans)

    def test_linear_gradient(self):
        grad = LinearGradient(
            "g1", (GradientStop(0, "#000"), GradientStop(100, "#fff")), rotation=30,
        )
        root = ET.fromstring(to_svg(_doc([], defs=[grad])))
        node = root.find(f"{NS}defs/{NS}linearGradient")
        assert node.get("id") == "g1"
        assert node.get("x2") == "100%"
        assert node.get("gradientTransform") == "rotate(30 0.5 0.5)"
        assert [s.get("offset") for s in node] == ["0%", "100%"]

    def test_pattern_and_filter(self):
        tile = TilePattern("t", 10, 4, (Rect(0, 0, 10, 2, Paint(fill="#000")),))
        noise = NoiseFilter("n", 0.0118, 3)
        root = ET.fromstring(to_svg(_doc([], defs=[tile, noise])))
        pattern = root.find(f"{NS}defs/{NS}pattern")
        assert pattern.get("patternUnits") == "userSpaceOnUse"
        assert len(pattern) == 1
        turbulence = root.find(f"{NS}defs/{NS}filter/{NS}feTurbulence")
        assert turbulence.get("baseFrequency") == "0.0118"
        assert turbulence.get("numOctaves") == "3"
        light = root.find(f".//{NS}feDistantLight")
        assert light.get("azimuth") == "45"

    def test_defs_empty_without_definitions(self):
        root = ET.fromstring(to_svg(_doc([Circle(1, 1, 1)])))
        assert len(root.find(f"{NS}defs")) == 0

    def test_control_characters_dropped_from_text(self):
        text = Text(0, 0, ("a\x01b\x1b", "\ud800c"), Font("serif", 10), line_height=12)
        root = ET.fromstring(to_svg(_doc([text])))
        assert [t.text for t in root.findall(f".//{NS}tspan")] == ["ab", "c"]

    @pytest.mark.parametrize("name", ["\x01bc Def", "\ud800abc", "\x07 \x1b"])
    def test_unprintable_names_are_well_formed(self, name):
        root = ET.fromstring(compose("avatar", name, 100).to_svg())
        text = root.find(f".//{NS}text")
        assert text.text and text.text.isprintable()

    @pytest.mark.parametrize("variant", sorted(VARIANTS))
    def test_every_variant_is_well_formed(self, variant):
        root = ET.fromstring(compose(variant, "Alex Morgan", 96).to_svg())
        assert root.get("width") == "96"

    def test_avatar_markup(self):
        svg = compose("avatar", "Alex Morgan", 64).to_svg()
        assert 'fill="#9754a1"' in svg
        assert ">AM</text>" in svg


class TestSerialize:

    def test_default_is_svg(self):
        doc = compose("avatar", "Ada")
        assert serialize(doc) == doc.to_svg()

    def test_compact_json(self):
        out = serialize(compose("avatar", "Ada"), SerializerFormat.JSON)
        assert "\n" not in out
        assert json.loads(out)["variant"] == "avatar"

    def test_pretty_json(self):
        out = serialize(compose("avatar", "Ada"), SerializerFormat.JSON_PRETTY)
        assert "\n  " in out
        data = json.loads(out)
        assert data["size"] == 100
        assert data["view_box"] == 100
