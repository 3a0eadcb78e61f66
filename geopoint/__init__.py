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
GeoPoint
========

Public API initialization.

This module re-exports selected classes and functions from the
submodules (primitives, utilities, quadkey, geohash, gio) so they can
be imported directly from :mod:`geopoint`.

Example
-------
>>> from geopoint import Point, geohash, quadkey_string
>>> p = Point(9.85, 57.097)
>>> geohash(p, 8)
'u4phb4hw'
"""

from .errors import (
    GeoPointError,
    InvalidEncodingError,
    OutOfRangeError,
)

from .utilities import (
    EARTH_RADIUS_M,
    DEG2RAD,
    RAD2DEG,
    deg_to_rad,
    rad_to_deg,
    haversine_distance,
    equirectangular_distance,
    initial_bearing,
)

from .primitives import (
    Point,
    Vector,
    DistanceMethod,
)

from .mercator import (
    project,
    unproject,
)

from .quadkey import (
    quadkey,
    quadkey_string,
    point_from_quadkey,
    point_from_quadkey_string,
    quadkey_from_tile,
    tile_from_quadkey,
    quadkey_to_string,
    quadkey_from_string,
    quadkey_bounds,
)

from .geohash import (
    BASE32,
    geohash,
    geohash_bits,
    geohash_from_bits,
    geohash_to_bits,
    ranges_from_geohash,
    ranges_from_geohash_bits,
    point_from_geohash,
    point_from_geohash_bits,
)

from .gio import (
    point_to_wkt,
    point_from_wkt,
    point_to_geojson,
    point_from_geojson,
    point_to_shapely,
    point_from_shapely,
    bounds_to_polygon,
    geohash_cell,
    quadkey_tile,
    read_geojson,
    write_geojson,
)


__all__ = [
    # errors
    "GeoPointError",
    "InvalidEncodingError",
    "OutOfRangeError",
    # utilities
    "EARTH_RADIUS_M",
    "DEG2RAD",
    "RAD2DEG",
    "deg_to_rad",
    "rad_to_deg",
    "haversine_distance",
    "equirectangular_distance",
    "initial_bearing",
    # primitives
    "Point",
    "Vector",
    "DistanceMethod",
    # projection
    "project",
    "unproject",
    # quadkey codec
    "quadkey",
    "quadkey_string",
    "point_from_quadkey",
    "point_from_quadkey_string",
    "quadkey_from_tile",
    "tile_from_quadkey",
    "quadkey_to_string",
    "quadkey_from_string",
    "quadkey_bounds",
    # geohash codec
    "BASE32",
    "geohash",
    "geohash_bits",
    "geohash_from_bits",
    "geohash_to_bits",
    "ranges_from_geohash",
    "ranges_from_geohash_bits",
    "point_from_geohash",
    "point_from_geohash_bits",
    # serialization
    "point_to_wkt",
    "point_from_wkt",
    "point_to_geojson",
    "point_from_geojson",
    "point_to_shapely",
    "point_from_shapely",
    "bounds_to_polygon",
    "geohash_cell",
    "quadkey_tile",
    "read_geojson",
    "write_geojson",
]
