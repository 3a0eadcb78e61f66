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
Geometric primitives for GeoPoint.

This module defines the 2D point used across the library, together
with the displacement vector returned by point subtraction and the
choice of geodesic distance formula.

Conventions
----------
* A point is an (x, y) pair. For geographic use it is read as
  (longitude, latitude) in decimal degrees.
* Coordinates are stored as floats. No range is enforced at
  construction; the codecs document their own expected domain and
  reject NaN or infinite coordinates.
* Geodesic distances are expressed in meters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Tuple, Union

import numpy as np

from geopoint.config import GEOHASH_PRECISION
from geopoint.utilities import (
    equirectangular_distance,
    euclidean_distance,
    haversine_distance,
    initial_bearing,
    squared_euclidean_distance,
)


# ============================================================================
# Basic types
# ============================================================================


class DistanceMethod(IntEnum):
    """
    Formula used by :meth:`Point.geo_distance_from`.

    * ``HAVERSINE``: great-circle distance on a sphere.
    * ``EQUIRECTANGULAR``: faster flat approximation, accurate for
      short distances.
    """

    HAVERSINE = 0
    EQUIRECTANGULAR = 1

    @classmethod
    def parse(cls, value: Union["DistanceMethod", str]) -> "DistanceMethod":
        """
        Accept a member or its case-insensitive name.
        """
        if isinstance(value, cls):
            return value

        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(
                "Invalid distance method. Expected 'haversine' or "
                f"'equirectangular', got: {value!r}"
            )


@dataclass(frozen=True)
class Vector:
    """
    Displacement between two points.

    Parameters
    ----------
    x, y : float
        Horizontal and vertical components.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def to_tuple(self) -> Tuple[float, float]:
        return self.x, self.y

    def equal(self, other: "Vector") -> bool:
        """Component-wise equality."""
        return self.x == other.x and self.y == other.y


@dataclass(frozen=True)
class Point:
    """
    Simple 2D point.

    Parameters
    ----------
    x : float
        Horizontal component, the longitude in degrees.
    y : float
        Vertical component, the latitude in degrees.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        # ints and numpy scalars are stored as plain floats
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def lng(self) -> float:
        """Longitude, alias of ``x``."""
        return self.x

    @property
    def lat(self) -> float:
        """Latitude, alias of ``y``."""
        return self.y

    def is_finite(self) -> bool:
        """
        True if neither coordinate is NaN or infinite.
        """
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_tuple(self) -> Tuple[float, float]:
        """
        Return the point as a (lng, lat) tuple.
        """
        return self.x, self.y

    def to_array(self) -> np.ndarray:
        """
        Return the point as a numpy array of two floats.
        """
        return np.array([self.x, self.y], dtype=float)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, vector: Vector) -> "Point":
        """
        Return a new point translated by ``vector``.
        """
        return Point(self.x + vector.x, self.y + vector.y)

    def subtract(self, point: "Point") -> Vector:
        """
        Return the vector going from ``point`` to this point.
        """
        return Vector(self.x - point.x, self.y - point.y)

    def equal(self, point: "Point") -> bool:
        """
        True if both points have exactly the same coordinates.
        """
        return self.x == point.x and self.y == point.y

    def __add__(self, vector: Vector) -> "Point":
        if not isinstance(vector, Vector):
            return NotImplemented
        return self.add(vector)

    def __sub__(self, point: "Point") -> Vector:
        if not isinstance(point, Point):
            return NotImplemented
        return self.subtract(point)

    # ------------------------------------------------------------------
    # Distances
    # ------------------------------------------------------------------

    def distance_from(self, point: "Point") -> float:
        """
        Euclidean distance between the points, in coordinate units.
        """
        return euclidean_distance(self.x, self.y, point.x, point.y)

    def squared_distance_from(self, point: "Point") -> float:
        """
        Squared Euclidean distance. This avoids a sqrt computation.
        """
        return squared_euclidean_distance(self.x, self.y, point.x, point.y)

    def geo_distance_from(
        self,
        point: "Point",
        method: Union[DistanceMethod, str] = DistanceMethod.HAVERSINE,
    ) -> float:
        """
        Geodesic distance to another point.

        Parameters
        ----------
        point : Point
            Target point.
        method : DistanceMethod or str, optional
            ``HAVERSINE`` (default) or ``EQUIRECTANGULAR``.

        Returns
        -------
        float
            Distance in meters.

        Raises
        ------
        ValueError
            If ``method`` is not a supported formula.
        """
        method = DistanceMethod.parse(method)

        if method == DistanceMethod.EQUIRECTANGULAR:
            return equirectangular_distance(
                self.lng, self.lat, point.lng, point.lat
            )

        return haversine_distance(self.lng, self.lat, point.lng, point.lat)

    def bearing_to(self, point: "Point") -> float:
        """
        Initial bearing, in degrees within (-180, 180], one must start
        travelling on Earth to head toward ``point``.
        """
        return initial_bearing(self.lng, self.lat, point.lng, point.lat)

    # ------------------------------------------------------------------
    # Spatial keys
    # ------------------------------------------------------------------

    def quadkey(self, level: int) -> int:
        """
        Integer quadkey of this point, see :func:`geopoint.quadkey.quadkey`.
        """
        # Local import to avoid circular dependencies (the codecs
        # import Point from this module).
        from geopoint.quadkey import quadkey

        return quadkey(self, level)

    def quadkey_string(self, level: int, legacy_padding: bool = False) -> str:
        """
        Base-4 quadkey of this point.
        """
        from geopoint.quadkey import quadkey_string

        return quadkey_string(self, level, legacy_padding=legacy_padding)

    def geohash(self, precision: int = GEOHASH_PRECISION) -> str:
        """
        Geohash string of this point, ``precision`` characters long.
        """
        from geopoint.geohash import geohash

        return geohash(self, precision)

    def geohash_bits(self, bit_count: int) -> int:
        """
        Integer geohash of this point, down to ``bit_count`` bits.
        """
        from geopoint.geohash import geohash_bits

        return geohash_bits(self, bit_count)

    @classmethod
    def from_quadkey(cls, key: int, level: int) -> "Point":
        from geopoint.quadkey import point_from_quadkey

        return point_from_quadkey(key, level)

    @classmethod
    def from_quadkey_string(cls, key: str) -> "Point":
        from geopoint.quadkey import point_from_quadkey_string

        return point_from_quadkey_string(key)

    @classmethod
    def from_geohash(cls, hash_string: str) -> "Point":
        from geopoint.geohash import point_from_geohash

        return point_from_geohash(hash_string)

    @classmethod
    def from_geohash_bits(cls, bits: int, bit_count: int) -> "Point":
        from geopoint.geohash import point_from_geohash_bits

        return point_from_geohash_bits(bits, bit_count)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_wkt(self) -> str:
        """
        Return the point in WKT format, e.g. ``POINT(30.5 10.5)``.
        """
        from geopoint.gio import point_to_wkt

        return point_to_wkt(self)

    def to_geojson(self) -> Dict[str, Any]:
        """
        Return a GeoJSON Point geometry as a mapping.
        """
        from geopoint.gio import point_to_geojson

        return point_to_geojson(self)

    def __str__(self) -> str:
        return self.to_wkt()
