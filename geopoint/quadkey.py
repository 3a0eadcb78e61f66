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
Quadkey codec.

A quadkey identifies one tile of the spherical Mercator quadtree at a
given zoom level (see :mod:`geopoint.mercator`). The integer form
interleaves the bits of the tile indices: bit ``i`` of ``x`` goes to
position ``2*i`` and bit ``i`` of ``y`` to position ``2*i + 1``. Read
in base 4, each digit is ``2*y_bit + x_bit`` for one level, most
significant level first.

The string form is the base-4 rendering of the integer, one character
per level, as used by the Bing Maps tile system.

Example
-------
>>> from geopoint.primitives import Point
>>> quadkey(Point(-87.65005229999997, 41.850033), 15)
212521785
>>> quadkey_string(Point(-87.65005229999997, 41.850033), 15)
'030222231030321'
"""

from __future__ import annotations

import logging
from typing import Tuple

from geopoint.config import QUADKEY_MAX_LEVEL
from geopoint.errors import InvalidEncodingError, OutOfRangeError
from geopoint.mercator import project, unproject
from geopoint.primitives import Point

logger = logging.getLogger(__name__)

_BASE4_DIGITS = "0123"


# ============================================================================
# Validation helpers
# ============================================================================


def _check_level(level: int) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        raise TypeError(f"Quadkey level must be an int, got {level!r}")
    if not 0 <= level <= QUADKEY_MAX_LEVEL:
        raise OutOfRangeError(
            f"Quadkey level {level} outside [0, {QUADKEY_MAX_LEVEL}]"
        )
    return level


def _check_point(point: Point) -> Point:
    if not point.is_finite():
        raise OutOfRangeError(f"Cannot encode non-finite point {point!r}")
    return point


def _check_key(key: int, level: int) -> int:
    if not 0 <= key < (1 << (2 * level)):
        raise OutOfRangeError(
            f"Quadkey {key} does not fit in {level} levels"
        )
    return key


# ============================================================================
# Tile <-> integer key
# ============================================================================


def quadkey_from_tile(x: int, y: int, level: int) -> int:
    """
    Interleave tile indices into an integer quadkey.

    Parameters
    ----------
    x, y : int
        Tile indices, each in ``[0, 2**level)``.
    level : int
        Zoom level, in ``[0, QUADKEY_MAX_LEVEL]``.

    Returns
    -------
    int
        Quadkey in ``[0, 4**level)``.
    """
    _check_level(level)
    if not (0 <= x < (1 << level) and 0 <= y < (1 << level)):
        raise OutOfRangeError(
            f"Tile ({x}, {y}) outside the grid of level {level}"
        )

    result = 0
    for i in range(level):
        result |= (x & (1 << i)) << i
        result |= (y & (1 << i)) << (i + 1)

    return result


def tile_from_quadkey(key: int, level: int) -> Tuple[int, int]:
    """
    Split an integer quadkey back into its tile indices.

    Returns
    -------
    x, y : int
        Tile indices at ``level``.
    """
    _check_level(level)
    _check_key(key, level)

    x = 0
    y = 0
    for i in range(level):
        x |= (key & (1 << (2 * i))) >> i
        y |= (key & (1 << (2 * i + 1))) >> (i + 1)

    return x, y


# ============================================================================
# Integer key <-> string
# ============================================================================


def quadkey_to_string(
    key: int,
    level: int,
    legacy_padding: bool = False,
) -> str:
    """
    Render an integer quadkey as a base-4 string.

    Parameters
    ----------
    key : int
        Integer quadkey.
    level : int
        Zoom level the key was computed at.
    legacy_padding : bool, optional
        By default the string is left padded with ``'0'`` to exactly
        ``level`` characters. If True, the unpadded base-4 text gets
        ``((level + 1) - len(text)) // 2`` leading zeros instead,
        which is the historical rule. The two agree whenever the key
        has at most one leading zero digit.

    Returns
    -------
    str
        Base-4 representation of ``key``.
    """
    _check_level(level)
    _check_key(key, level)

    if legacy_padding:
        digits = _to_base4(key)
        zeros = ((level + 1) - len(digits)) // 2
        return "0" * zeros + digits

    return "".join(
        _BASE4_DIGITS[(key >> (2 * (level - 1 - i))) & 3]
        for i in range(level)
    )


def quadkey_from_string(text: str) -> Tuple[int, int]:
    """
    Parse a base-4 quadkey string.

    The zoom level is the length of the string.

    Returns
    -------
    key, level : int
        Integer quadkey and its level.

    Raises
    ------
    InvalidEncodingError
        If ``text`` contains a character other than 0, 1, 2 or 3.
    OutOfRangeError
        If ``text`` is longer than ``QUADKEY_MAX_LEVEL``.
    """
    level = _check_level(len(text))

    key = 0
    for char in text:
        digit = _BASE4_DIGITS.find(char)
        if digit < 0:
            logger.debug("Rejecting quadkey string %r", text)
            raise InvalidEncodingError(
                f"Invalid quadkey character {char!r} in {text!r}"
            )
        key = (key << 2) | digit

    return key, level


def _to_base4(value: int) -> str:
    if value == 0:
        return "0"

    digits = []
    while value:
        digits.append(_BASE4_DIGITS[value & 3])
        value >>= 2

    return "".join(reversed(digits))


# ============================================================================
# Point <-> quadkey
# ============================================================================


def quadkey(point: Point, level: int) -> int:
    """
    Return the integer quadkey of the tile containing a point.

    Parameters
    ----------
    point : Point
        Location as (longitude, latitude) in degrees.
    level : int
        Zoom level, in ``[0, QUADKEY_MAX_LEVEL]``. Level 0 is the
        single world tile, so its key is always 0.

    Returns
    -------
    int
        Quadkey in ``[0, 4**level)``.
    """
    _check_level(level)
    _check_point(point)
    x, y = project(point.lng, point.lat, level)
    return quadkey_from_tile(x, y, level)


def point_from_quadkey(key: int, level: int) -> Point:
    """
    Return the north-west corner of the tile identified by a quadkey.

    The result lies within one tile (``360 / 2**level`` degrees of
    longitude) of any point that encodes to ``key``.
    """
    x, y = tile_from_quadkey(key, level)
    lng, lat = unproject(x, y, level)
    return Point(lng, lat)


def quadkey_string(
    point: Point,
    level: int,
    legacy_padding: bool = False,
) -> str:
    """
    Return the quadkey of a point as a base-4 string.

    See :func:`quadkey_to_string` for the meaning of
    ``legacy_padding``.
    """
    return quadkey_to_string(
        quadkey(point, level), level, legacy_padding=legacy_padding
    )


def point_from_quadkey_string(text: str) -> Point:
    """
    Decode a base-4 quadkey string, taking its length as the level.
    """
    key, level = quadkey_from_string(text)
    return point_from_quadkey(key, level)


def quadkey_bounds(
    key: int,
    level: int,
) -> Tuple[float, float, float, float]:
    """
    Geographic extent of a quadkey tile.

    Returns
    -------
    west, east, south, north : float
        Bounding longitudes and latitudes in degrees.
    """
    x, y = tile_from_quadkey(key, level)
    west, north = unproject(x, y, level)
    east, south = unproject(x + 1, y + 1, level)
    return west, east, south, north
