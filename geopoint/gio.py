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
Input/output utilities for GeoPoint objects.

This module converts :class:`~geopoint.primitives.Point` instances to
and from text formats (WKT, GeoJSON) and shapely geometries, and
exports the cells of the spatial keys as shapely polygons.

The focus is on geometry only: CRS handling, styling and extra fields
are intentionally ignored or kept minimal. All coordinates are
interpreted as (longitude, latitude) in decimal degrees.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from shapely import wkt as shapely_wkt
from shapely.errors import ShapelyError
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon, box

from geopoint.errors import InvalidEncodingError
from geopoint.geohash import ranges_from_geohash
from geopoint.primitives import Point
from geopoint.quadkey import quadkey_bounds

logger = logging.getLogger(__name__)


# ============================================================================
# WKT
# ============================================================================


def _format_coordinate(value: float) -> str:
    # shortest round-tripping repr, integral values without ".0"
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def point_to_wkt(point: Point) -> str:
    """
    Return the point in WKT format, e.g. ``POINT(30.5 10.5)``.
    """
    return "POINT({} {})".format(
        _format_coordinate(point.x), _format_coordinate(point.y)
    )


def point_from_wkt(text: str) -> Point:
    """
    Parse a WKT point.

    Raises
    ------
    InvalidEncodingError
        If ``text`` is not valid WKT or does not describe a non-empty
        point.
    """
    try:
        geom = shapely_wkt.loads(text)
    except ShapelyError as exc:
        raise InvalidEncodingError(f"Cannot parse WKT {text!r}: {exc}")

    return point_from_shapely(geom)


# ============================================================================
# Shapely
# ============================================================================


def point_to_shapely(point: Point) -> ShapelyPoint:
    """
    Convert a Point to a shapely Point.
    """
    return ShapelyPoint(point.x, point.y)


def point_from_shapely(geom: Any) -> Point:
    """
    Convert a shapely Point to a Point.
    """
    if geom.geom_type != "Point" or geom.is_empty:
        raise InvalidEncodingError(
            f"Expected a non-empty Point geometry, got {geom.wkt}"
        )
    return Point(float(geom.x), float(geom.y))


def bounds_to_polygon(
    west: float,
    east: float,
    south: float,
    north: float,
) -> Polygon:
    """
    Rectangular polygon for a (west, east, south, north) extent.
    """
    return box(west, south, east, north)


def geohash_cell(hash_string: str) -> Polygon:
    """
    Polygon covering the cell of a geohash string.
    """
    lng_min, lng_max, lat_min, lat_max = ranges_from_geohash(hash_string)
    return bounds_to_polygon(lng_min, lng_max, lat_min, lat_max)


def quadkey_tile(key: int, level: int) -> Polygon:
    """
    Polygon covering the tile of an integer quadkey.
    """
    return bounds_to_polygon(*quadkey_bounds(key, level))


# ============================================================================
# GeoJSON
# ============================================================================


def point_to_geojson(point: Point) -> Dict[str, Any]:
    """
    GeoJSON Point geometry of a Point.
    """
    return {"type": "Point", "coordinates": [point.x, point.y]}


def point_from_geojson(obj: Mapping[str, Any]) -> Point:
    """
    Build a Point from a GeoJSON Point geometry or a Feature holding
    one.

    Raises
    ------
    InvalidEncodingError
        If the object is not a Point geometry or Point feature.
    """
    if obj.get("type") == "Feature":
        obj = obj.get("geometry") or {}

    if obj.get("type") != "Point":
        raise InvalidEncodingError(
            f"Expected a GeoJSON Point, got type {obj.get('type')!r}"
        )

    coords = obj.get("coordinates")
    if not isinstance(coords, (list, tuple)) or len(coords) < 2:
        raise InvalidEncodingError(
            f"Invalid GeoJSON Point coordinates: {coords!r}"
        )

    return Point(float(coords[0]), float(coords[1]))


def write_geojson(
    points: Iterable[Point],
    path: Union[str, Path],
    properties: Optional[Iterable[Mapping[str, Any]]] = None,
    indent: Optional[int] = 2,
) -> None:
    """
    Write points as a GeoJSON FeatureCollection.

    Parameters
    ----------
    points : iterable of Point
        Points to export, one feature each.
    path : str or pathlib.Path
        Output file path.
    properties : iterable of mappings, optional
        Per-feature properties, matched to ``points`` by position.
    indent : int or None, optional
        JSON indentation. Default is 2.
    """
    points = list(points)
    if properties is None:
        props: List[Mapping[str, Any]] = [{} for _ in points]
    else:
        props = list(properties)
        if len(props) != len(points):
            raise ValueError(
                "Number of properties does not match number of points."
            )

    features = [
        {
            "type": "Feature",
            "geometry": point_to_geojson(point),
            "properties": dict(prop),
        }
        for point, prop in zip(points, props)
    ]

    data = {"type": "FeatureCollection", "features": features}

    path = Path(path)
    with path.open("w", encoding="utf-8") as fobj:
        json.dump(data, fobj, indent=indent)

    logger.info("Wrote %d points to %s", len(features), path)


def read_geojson(path: Union[str, Path]) -> List[Point]:
    """
    Read points from a GeoJSON file.

    The file may contain a Geometry, a Feature or a
    FeatureCollection. Non-point geometries are skipped.

    Parameters
    ----------
    path : str or pathlib.Path
        Path to the GeoJSON file.

    Returns
    -------
    list of Point
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as fobj:
        data = json.load(fobj)

    if data.get("type") == "FeatureCollection":
        items = data.get("features", [])
    else:
        items = [data]

    result: List[Point] = []
    for item in items:
        geom = item.get("geometry") if item.get("type") == "Feature" else item
        if not geom or geom.get("type") != "Point":
            logger.debug("Skipping non-point geometry in %s", path)
            continue
        result.append(point_from_geojson(geom))

    logger.info("Read %d points from %s", len(result), path)
    return result
