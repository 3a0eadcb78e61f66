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
Core geodetic utilities for GeoPoint.

This module contains the low-level constants and formulas used by the
point primitives: angle conversions, spherical distances and the
initial bearing between two locations. It does not depend on any
other GeoPoint module.

Conventions
----------
* Geographic coordinates are always given as (longitude, latitude) in
  decimal degrees, unless explicitly stated otherwise.
* Distances are returned in meters.
* Angles in the internal computations are expressed in radians.
"""

from __future__ import annotations

from typing import Union

import numpy as np

Number = Union[float, int]
ArrayLike = Union[Number, np.ndarray]


# -----------------------------------------------------------------------------
# Geodetic constants
# -----------------------------------------------------------------------------


#: Earth radius in meters used by the geodesic distances (WGS84
#: semi-major axis, the value used by web-mapping tile systems).
EARTH_RADIUS_M: float = 6_378_137.0

#: Degrees-to-radians conversion factor.
DEG2RAD: float = np.pi / 180.0

#: Radians-to-degrees conversion factor.
RAD2DEG: float = 180.0 / np.pi


# -----------------------------------------------------------------------------
# Basic angle helpers
# -----------------------------------------------------------------------------


def deg_to_rad(angle_deg: ArrayLike) -> ArrayLike:
    """
    Convert degrees to radians.

    Parameters
    ----------
    angle_deg : float or array_like
        Angle in degrees.

    Returns
    -------
    float or numpy.ndarray
        Angle in radians with the same shape as the input.
    """
    return np.asarray(angle_deg) * DEG2RAD


def rad_to_deg(angle_rad: ArrayLike) -> ArrayLike:
    """
    Convert radians to degrees.
    """
    return np.asarray(angle_rad) * RAD2DEG


# -----------------------------------------------------------------------------
# Planar helpers
# -----------------------------------------------------------------------------


def squared_euclidean_distance(
    x1: Number,
    y1: Number,
    x2: Number,
    y2: Number,
) -> float:
    """
    Squared planar distance between (x1, y1) and (x2, y2).

    Useful for comparisons, since it avoids the square root.
    """
    dx = x2 - x1
    dy = y2 - y1
    return float(dx * dx + dy * dy)


def euclidean_distance(
    x1: Number,
    y1: Number,
    x2: Number,
    y2: Number,
) -> float:
    """
    Planar distance between (x1, y1) and (x2, y2), in input units.
    """
    return float(np.sqrt(squared_euclidean_distance(x1, y1, x2, y2)))


# -----------------------------------------------------------------------------
# Geodesic calculators
# -----------------------------------------------------------------------------


def haversine_distance(
    lon1_deg: Number,
    lat1_deg: Number,
    lon2_deg: Number,
    lat2_deg: Number,
    radius_m: float = EARTH_RADIUS_M,
) -> float:
    """
    Compute great-circle distance between two points on a sphere.

    The calculation uses the Haversine formula and assumes a spherical
    Earth with radius ``radius_m``.

    Parameters
    ----------
    lon1_deg, lat1_deg : float
        Longitude and latitude of the first point in degrees.
    lon2_deg, lat2_deg : float
        Longitude and latitude of the second point in degrees.
    radius_m : float, optional
        Sphere radius in meters. Default is :data:`EARTH_RADIUS_M`.

    Returns
    -------
    float
        Great-circle distance between the two points in meters.
    """
    dlat = (lat2_deg - lat1_deg) * DEG2RAD
    dlon = (lon2_deg - lon1_deg) * DEG2RAD

    sin_dlat = np.sin(0.5 * dlat)
    sin_dlon = np.sin(0.5 * dlon)

    a = (
        sin_dlat * sin_dlat
        + np.cos(lat1_deg * DEG2RAD) * np.cos(lat2_deg * DEG2RAD)
        * sin_dlon * sin_dlon
    )
    c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))

    return float(radius_m * c)


def equirectangular_distance(
    lon1_deg: Number,
    lat1_deg: Number,
    lon2_deg: Number,
    lat2_deg: Number,
    radius_m: float = EARTH_RADIUS_M,
) -> float:
    """
    Approximate surface distance between two points.

    Pythagoras is applied on an equirectangular projection centred on
    the mean latitude of the two points. It is faster than
    :func:`haversine_distance` and accurate for short separations.

    Parameters
    ----------
    lon1_deg, lat1_deg : float
        Longitude and latitude of the first point in degrees.
    lon2_deg, lat2_deg : float
        Longitude and latitude of the second point in degrees.
    radius_m : float, optional
        Sphere radius in meters. Default is :data:`EARTH_RADIUS_M`.

    Returns
    -------
    float
        Approximate distance in meters.
    """
    dlat = (lat2_deg - lat1_deg) * DEG2RAD
    dlon = (lon2_deg - lon1_deg) * DEG2RAD

    x = dlon * np.cos(0.5 * (lat1_deg + lat2_deg) * DEG2RAD)

    return float(np.sqrt(dlat * dlat + x * x) * radius_m)


def initial_bearing(
    lon1_deg: Number,
    lat1_deg: Number,
    lon2_deg: Number,
    lat2_deg: Number,
) -> float:
    """
    Compute the initial bearing from point 1 to point 2.

    The bearing is the direction one must start travelling along the
    great circle to reach point 2. It is measured clockwise from
    geographic north and returned in degrees in the range (-180, 180].

    Parameters
    ----------
    lon1_deg, lat1_deg : float
        Longitude and latitude of the start point in degrees.
    lon2_deg, lat2_deg : float
        Longitude and latitude of the end point in degrees.

    Returns
    -------
    float
        Initial bearing in degrees.
    """
    lat1 = lat1_deg * DEG2RAD
    lat2 = lat2_deg * DEG2RAD
    dlon = (lon2_deg - lon1_deg) * DEG2RAD

    y = np.sin(dlon) * np.cos(lat2)
    x = (
        np.cos(lat1) * np.sin(lat2)
        - np.sin(lat1) * np.cos(lat2) * np.cos(dlon)
    )

    return float(np.arctan2(y, x) * RAD2DEG)
