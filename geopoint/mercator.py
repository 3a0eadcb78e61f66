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
Spherical Mercator tile projection.

The world is split into a ``2**level x 2**level`` grid of square tiles
following the web-mapping (Bing Maps / slippy map) convention:

* ``x`` grows eastward from longitude -180.
* ``y`` grows southward from the top edge of the projection
  (latitude ~85.0511).

:func:`project` maps a (longitude, latitude) pair to the integer tile
containing it, and :func:`unproject` maps a tile back to the geographic
coordinates of its north-west corner.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

from geopoint.config import MERCATOR_SIN_LIMIT

logger = logging.getLogger(__name__)


def project(lng: float, lat: float, level: int) -> Tuple[int, int]:
    """
    Project geographic coordinates onto the tile grid of a zoom level.

    Parameters
    ----------
    lng, lat : float
        Longitude and latitude in degrees.
    level : int
        Zoom level. The grid has ``2**level`` tiles per side.

    Returns
    -------
    x, y : int
        Tile indices, each in ``[0, 2**level)``. Coordinates outside
        the projection domain are clamped to the border tiles.
    """
    factor = 1 << level
    max_tiles = float(factor)

    x = int(math.floor((lng / 360.0 + 0.5) * max_tiles))

    siny = math.sin(lat * math.pi / 180.0)
    if abs(siny) > MERCATOR_SIN_LIMIT:
        logger.debug(
            "Latitude %s outside the Mercator domain, clamping.", lat
        )
        siny = math.copysign(MERCATOR_SIN_LIMIT, siny)

    merc = 0.5 - math.log((1.0 + siny) / (1.0 - siny)) / (4.0 * math.pi)
    y = int(math.floor(merc * max_tiles))

    return _clamp(x, 0, factor - 1), _clamp(y, 0, factor - 1)


def unproject(x: int, y: int, level: int) -> Tuple[float, float]:
    """
    Inverse of :func:`project`.

    Parameters
    ----------
    x, y : int
        Tile indices.
    level : int
        Zoom level of the grid.

    Returns
    -------
    lng, lat : float
        Longitude and latitude in degrees of the north-west corner of
        the tile.
    """
    max_tiles = float(1 << level)

    lng = 360.0 * (x / max_tiles - 0.5)
    lat = (
        2.0 * math.atan(math.exp(math.pi - 2.0 * math.pi * y / max_tiles))
        * (180.0 / math.pi)
        - 90.0
    )

    return lng, lat


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))
