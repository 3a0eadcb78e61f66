#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ****************************************************************************
#
# Copyright (C) 2019-2025, GeoPoint Developers.
# This file is part of GeoPoint.
#
# GeoPoint is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# GeoPoint is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# with this download. If not, see <http://www.gnu.org/licenses/>
#
# ****************************************************************************
"""
Serialization helpers - TEST
"""
import json

import pytest
from shapely.geometry import Point as ShapelyPoint

from geopoint.errors import InvalidEncodingError
from geopoint.geohash import ranges_from_geohash
from geopoint.gio import (
    geohash_cell,
    point_from_geojson,
    point_from_shapely,
    point_from_wkt,
    point_to_shapely,
    point_to_wkt,
    quadkey_tile,
    read_geojson,
    write_geojson,
)
from geopoint.primitives import Point


@pytest.fixture
def points():
    return [Point(9.85, 57.097), Point(-122.32, 49.03), Point(0, 0)]


def test_point_to_wkt():
    assert point_to_wkt(Point(1, 2.5)) == "POINT(1 2.5)"
    assert point_to_wkt(Point(-87.65005229999997, 41.850033)) == \
        "POINT(-87.65005229999997 41.850033)"
    assert point_to_wkt(Point(-3.0, 0.0)) == "POINT(-3 0)"

def test_point_from_wkt():
    assert point_from_wkt("POINT (30.5 10.5)") == Point(30.5, 10.5)
    assert point_from_wkt(point_to_wkt(Point(1, 2.5))) == Point(1, 2.5)

@pytest.mark.parametrize("text", [
    "LINESTRING (0 0, 1 1)",
    "POINT EMPTY",
    "not a geometry",
])
def test_point_from_wkt_invalid(text):
    with pytest.raises(InvalidEncodingError):
        point_from_wkt(text)

def test_shapely_conversion():
    p = Point(12.5, -3.25)
    geom = point_to_shapely(p)
    assert isinstance(geom, ShapelyPoint)
    assert (geom.x, geom.y) == (12.5, -3.25)
    assert point_from_shapely(geom) == p

def test_geohash_cell():
    cell = geohash_cell("u4phb4hw")
    lng_min, lng_max, lat_min, lat_max = ranges_from_geohash("u4phb4hw")

    assert cell.bounds == pytest.approx((lng_min, lat_min, lng_max, lat_max))
    assert cell.contains(ShapelyPoint(9.85, 57.097))
    assert not cell.contains(ShapelyPoint(9.9, 57.097))

def test_quadkey_tile():
    tile = quadkey_tile(212521785, 15)
    assert tile.contains(ShapelyPoint(-87.65005229999997, 41.850033))
    assert tile.bounds[2] - tile.bounds[0] == pytest.approx(360.0 / 2 ** 15)

def test_point_from_geojson():
    geometry = {"type": "Point", "coordinates": [1.0, 2.0]}
    feature = {"type": "Feature", "geometry": geometry, "properties": {}}

    assert point_from_geojson(geometry) == Point(1.0, 2.0)
    assert point_from_geojson(feature) == Point(1.0, 2.0)
    assert point_from_geojson(Point(3, 4).to_geojson()) == Point(3, 4)

    with pytest.raises(InvalidEncodingError):
        point_from_geojson({"type": "LineString", "coordinates": [[0, 0]]})
    with pytest.raises(InvalidEncodingError):
        point_from_geojson({"type": "Point", "coordinates": [1.0]})

def test_write_read_geojson(tmp_path, points):
    path = tmp_path / "points.geojson"
    props = [{"name": "Aalborg"}, {"name": "Abbotsford"}, {"name": "Null"}]

    write_geojson(points, path, properties=props)

    with open(path, "r", encoding="utf-8") as fobj:
        data = json.load(fobj)
    assert data["type"] == "FeatureCollection"
    assert len(data["features"]) == 3
    assert data["features"][0]["properties"] == {"name": "Aalborg"}

    assert read_geojson(path) == points

def test_write_geojson_properties_mismatch(tmp_path, points):
    with pytest.raises(ValueError):
        write_geojson(points, tmp_path / "bad.geojson", properties=[{}])

def test_read_geojson_skips_other_geometries(tmp_path):
    path = tmp_path / "mixed.geojson"
    data = {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "properties": {},
             "geometry": {"type": "Point", "coordinates": [1, 2]}},
            {"type": "Feature", "properties": {},
             "geometry": {"type": "LineString",
                          "coordinates": [[0, 0], [1, 1]]}},
        ],
    }
    path.write_text(json.dumps(data), encoding="utf-8")

    assert read_geojson(path) == [Point(1.0, 2.0)]
