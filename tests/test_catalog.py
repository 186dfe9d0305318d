# Copyright (c) 2026 Hashglyph
# SPDX-License-Identifier: MIT

"""Tests for the constellation catalog and line normalization."""

import pytest

from hashglyph.render.catalog import (
    Constellation,
    load_catalog,
    normalize_lines,
    parse_catalog,
)


def _feature(fid, name, geometry):
    return {"type": "Feature", "id": fid, "properties": {"name": name}, "geometry": geometry}


class TestLoadCatalog:

    def test_bundled_catalog(self):
        catalog = load_catalog()
        assert len(catalog) >= 10
        assert all(isinstance(c, Constellation) for c in catalog)
        assert all(c.lines for c in catalog)

    def test_cached(self):
        assert load_catalog() is load_catalog()

    def test_names(self):
        names = {c.name for c in load_catalog()}
        assert {"Orion", "Ursa Major", "Cassiopeia"} <= names


class TestParseCatalog:

    def test_line_string_accepted(self):
        data = {"features": [
            _feature("A", "Alpha", {"type": "LineString", "coordinates": [[0, 0], [1, 1]]}),
        ]}
        (entry,) = parse_catalog(data)
        assert entry.id == "A"
        assert entry.name == "Alpha"
        assert entry.lines == (((0.0, 0.0), (1.0, 1.0)),)

    def test_other_geometries_skipped(self):
        data = {"features": [
            _feature("P", "Point", {"type": "Point", "coordinates": [0, 0]}),
            _feature("B", "Beta", {"type": "MultiLineString", "coordinates": [[[0, 0], [2, 2]]]}),
        ]}
        assert [c.id for c in parse_catalog(data)] == ["B"]

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValueError, match="no line features"):
            parse_catalog({"features": []})


class TestNormalizeLines:

    def test_fits_extent_and_centers(self):
        lines = [[(0.0, 0.0), (10.0, 5.0)]]
        ((a, b),) = normalize_lines(lines)
        # width 10 -> 60 units, height 5 -> 30 units
        assert a == pytest.approx((20.0, 65.0))
        assert b == pytest.approx((80.0, 35.0))

    def test_vertical_axis_flipped(self):
        ((low, high),) = normalize_lines([[(0.0, 0.0), (0.0, 10.0)]])
        assert high[1] < low[1]

    def test_single_point_is_centered(self):
        ((point,),) = normalize_lines([[(42.0, -7.0)]])
        assert point == pytest.approx((50.0, 50.0))

    def test_horizontal_line_no_division_by_zero(self):
        ((a, b),) = normalize_lines([[(0.0, 3.0), (10.0, 3.0)]])
        assert a == pytest.approx((20.0, 50.0))
        assert b == pytest.approx((80.0, 50.0))

    def test_vertical_line_no_division_by_zero(self):
        ((a, b),) = normalize_lines([[(5.0, 0.0), (5.0, 4.0)]])
        assert a[0] == pytest.approx(50.0)
        assert b[0] == pytest.approx(50.0)
        assert abs(a[1] - b[1]) == pytest.approx(60.0)

    def test_empty(self):
        assert normalize_lines([]) == ()

    def test_bundled_figures_stay_on_canvas(self):
        for figure in load_catalog():
            for line in normalize_lines(figure.lines):
                for x, y in line:
                    assert 0.0 <= x <= 100.0
                    assert 0.0 <= y <= 100.0
