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
Geohash codec.

A geohash is built by repeatedly halving the longitude/latitude box
``[-180, 180] x [-90, 90]``. Even iterations (0-based) split longitude,
odd iterations split latitude; each split emits ``1`` when the
coordinate lies above the midpoint and ``0`` otherwise. The resulting
bitstream is kept either as an integer (:func:`geohash_bits`), which
allows bit-level precision and integer ordering of nearby points, or
packed 5 bits per character into the base-32 alphabet
``0123456789bcdefghjkmnpqrstuvwxyz`` (:func:`geohash`).

Decoding replays the same bisection to recover the cell, and returns
its center as representative point.
"""

from __future__ import annotations

import logging
from typing import Tuple

from geopoint.config import (
    GEOHASH_MAX_BITS,
    GEOHASH_MAX_PRECISION,
    GEOHASH_PRECISION,
)
from geopoint.errors import InvalidEncodingError, OutOfRangeError
from geopoint.primitives import Point

logger = logging.getLogger(__name__)

#: Geohash base-32 alphabet (no 'a', 'i', 'l', 'o').
BASE32 = "0123456789bcdefghjkmnpqrstuvwxyz"

# ASCII lower and upper case only
_BASE32_INDEX = {char: index for index, char in enumerate(BASE32)}
_BASE32_INDEX.update(
    {char.upper(): index for index, char in enumerate(BASE32)}
)

Ranges = Tuple[float, float, float, float]


# ============================================================================
# Validation helpers
# ============================================================================


def _check_bit_count(bit_count: int) -> int:
    if isinstance(bit_count, bool) or not isinstance(bit_count, int):
        raise TypeError(f"Bit count must be an int, got {bit_count!r}")
    if not 0 <= bit_count <= GEOHASH_MAX_BITS:
        raise OutOfRangeError(
            f"Geohash bit count {bit_count} outside "
            f"[0, {GEOHASH_MAX_BITS}]"
        )
    return bit_count


def _check_point(point: Point) -> Point:
    if not point.is_finite():
        raise OutOfRangeError(f"Cannot encode non-finite point {point!r}")
    return point


def _check_precision(precision: int) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise TypeError(f"Precision must be an int, got {precision!r}")
    if not 0 <= precision <= GEOHASH_MAX_PRECISION:
        raise OutOfRangeError(
            f"Geohash precision {precision} outside "
            f"[0, {GEOHASH_MAX_PRECISION}]"
        )
    return precision


# ============================================================================
# Encoding
# ============================================================================


def geohash_bits(point: Point, bit_count: int) -> int:
    """
    Integer geohash of a point, down to a given number of bits.

    Points encoded with the same ``bit_count`` can be ordered and
    compared as plain integers.

    Parameters
    ----------
    point : Point
        Location as (longitude, latitude) in degrees.
    bit_count : int
        Number of bisection steps, in ``[0, GEOHASH_MAX_BITS]``.

    Returns
    -------
    int
        Bitstream with the first bisection in the most significant
        position.
    """
    _check_bit_count(bit_count)
    _check_point(point)

    lng_min, lng_max = -180.0, 180.0
    lat_min, lat_max = -90.0, 90.0

    bits = 0
    for i in range(bit_count):
        bits <<= 1

        # interleave: longitude on even steps, latitude on odd ones
        if i % 2 == 0:
            mid = (lng_min + lng_max) / 2.0
            if point.lng > mid:
                lng_min = mid
                bits |= 1
            else:
                lng_max = mid
        else:
            mid = (lat_min + lat_max) / 2.0
            if point.lat > mid:
                lat_min = mid
                bits |= 1
            else:
                lat_max = mid

    return bits


def geohash(point: Point, precision: int = GEOHASH_PRECISION) -> str:
    """
    Geohash string of a point.

    Parameters
    ----------
    point : Point
        Location as (longitude, latitude) in degrees.
    precision : int, optional
        Number of characters, default :data:`GEOHASH_PRECISION`.

    Returns
    -------
    str
        Geohash of exactly ``precision`` characters.
    """
    _check_precision(precision)
    return geohash_from_bits(geohash_bits(point, 5 * precision), precision)


def geohash_from_bits(bits: int, precision: int) -> str:
    """
    Pack an integer geohash of ``5 * precision`` bits into a string.

    Groups of 5 bits are taken from the least significant end and
    fill the string from its last character backward.
    """
    _check_precision(precision)

    chars = [""] * precision
    for i in range(1, precision + 1):
        chars[precision - i] = BASE32[bits & 0x1F]
        bits >>= 5

    return "".join(chars)


# ============================================================================
# Decoding
# ============================================================================


def geohash_to_bits(hash_string: str) -> Tuple[int, int]:
    """
    Unpack a geohash string into its integer bitstream.

    Decoding is case-insensitive for ASCII letters.

    Returns
    -------
    bits, bit_count : int
        Bitstream and its length (5 bits per character).

    Raises
    ------
    InvalidEncodingError
        If a character is not part of the geohash alphabet.
    OutOfRangeError
        If the string is longer than ``GEOHASH_MAX_PRECISION``.
    """
    _check_precision(len(hash_string))

    bits = 0
    for char in hash_string:
        index = _BASE32_INDEX.get(char)
        if index is None:
            logger.debug("Rejecting geohash %r", hash_string)
            raise InvalidEncodingError(
                f"Invalid geohash character {char!r} in {hash_string!r}"
            )
        bits = (bits << 5) | index

    return bits, 5 * len(hash_string)


def ranges_from_geohash_bits(bits: int, bit_count: int) -> Ranges:
    """
    Bounding box of an integer geohash.

    Parameters
    ----------
    bits : int
        Bitstream produced by :func:`geohash_bits`.
    bit_count : int
        Number of meaningful bits in ``bits``.

    Returns
    -------
    lng_min, lng_max, lat_min, lat_max : float
        Extent of the cell in degrees.
    """
    _check_bit_count(bit_count)
    if not 0 <= bits < (1 << bit_count):
        raise OutOfRangeError(
            f"Geohash {bits} does not fit in {bit_count} bits"
        )

    lng_min, lng_max = -180.0, 180.0
    lat_min, lat_max = -90.0, 90.0

    for i in range(bit_count):
        bit = (bits >> (bit_count - 1 - i)) & 1

        if i % 2 == 0:
            mid = (lng_min + lng_max) / 2.0
            if bit:
                lng_min = mid
            else:
                lng_max = mid
        else:
            mid = (lat_min + lat_max) / 2.0
            if bit:
                lat_min = mid
            else:
                lat_max = mid

    return lng_min, lng_max, lat_min, lat_max


def ranges_from_geohash(hash_string: str) -> Ranges:
    """Bounding box of a geohash string."""
    bits, bit_count = geohash_to_bits(hash_string)
    return ranges_from_geohash_bits(bits, bit_count)


def point_from_geohash_bits(bits: int, bit_count: int) -> Point:
    """
    Center of the cell encoded by an integer geohash.
    """
    lng_min, lng_max, lat_min, lat_max = ranges_from_geohash_bits(
        bits, bit_count
    )
    return Point((lng_min + lng_max) / 2.0, (lat_min + lat_max) / 2.0)


def point_from_geohash(hash_string: str) -> Point:
    """
    Center of the cell encoded by a geohash string.

    Encoding the returned point again at the same precision gives a
    cell that contains the original point.
    """
    bits, bit_count = geohash_to_bits(hash_string)
    return point_from_geohash_bits(bits, bit_count)
