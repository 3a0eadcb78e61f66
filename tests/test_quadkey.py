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
Unit tests for :mod:`geopoint.quadkey`.

Run with, e.g.:

    python -m unittest test_quadkey
or:

    python test_quadkey.py
"""

from __future__ import annotations

import unittest

import numpy as np

from geopoint.errors import InvalidEncodingError, OutOfRangeError
from geopoint.primitives import Point
from geopoint.quadkey import (
    point_from_quadkey,
    point_from_quadkey_string,
    quadkey,
    quadkey_bounds,
    quadkey_from_string,
    quadkey_from_tile,
    quadkey_string,
    quadkey_to_string,
    tile_from_quadkey,
)

CHICAGO = Point(-87.65005229999997, 41.850033)

# (lat, lng)
CITIES = [
    (57.09700, 9.85000),
    (49.03000, -122.32000),
    (39.23500, -76.17490),
    (-34.7666, 138.53670),
    (35.6895, 139.6917),
    (-33.8688, 151.2093),
    (64.1466, -21.9426),
]

EPSILON = 1e-6


class TestQuadkey(unittest.TestCase):
    """
    Encoding and decoding of integer quadkeys.
    """

    def test_known_value(self) -> None:
        """Reference tile of Chicago at level 15."""
        self.assertEqual(quadkey(CHICAGO, 15), 212521785)
        self.assertEqual(CHICAGO.quadkey(15), 212521785)

    def test_level_zero_is_zero(self) -> None:
        """The single world tile has key 0 whatever the point."""
        for lat, lng in CITIES + [(90.0, 180.0), (-90.0, -180.0)]:
            self.assertEqual(quadkey(Point(lng, lat), 0), 0)

    def test_level_one_quadrants(self) -> None:
        """Digit is 2*y_bit + x_bit, y growing southward."""
        self.assertEqual(quadkey(Point(-10.0, 10.0), 1), 0)
        self.assertEqual(quadkey(Point(10.0, 10.0), 1), 1)
        self.assertEqual(quadkey(Point(-10.0, -10.0), 1), 2)
        self.assertEqual(quadkey(Point(10.0, -10.0), 1), 3)

    def test_domain_corners_are_clamped(self) -> None:
        """Points on the domain border fall in the border tiles."""
        self.assertEqual(quadkey(Point(180.0, 90.0), 3), 21)
        self.assertEqual(quadkey(Point(-180.0, -90.0), 3), 42)

    def test_round_trip_cities(self) -> None:
        """Decoded tile corner stays within EPSILON at level 30."""
        level = 30
        for lat, lng in CITIES:
            key = quadkey(Point(lng, lat), level)
            p = point_from_quadkey(key, level)

            self.assertLess(
                abs(p.lat - lat), EPSILON,
                msg=f"latitude mismatch: {p.lat} != {lat}",
            )
            self.assertLess(
                abs(p.lng - lng), EPSILON,
                msg=f"longitude mismatch: {p.lng} != {lng}",
            )

    def test_round_trip_random_levels(self) -> None:
        """Decoding is within one tile width for every level."""
        rng = np.random.default_rng(42)
        lngs = rng.uniform(-179.0, 179.0, 50)
        lats = rng.uniform(-80.0, 80.0, 50)

        for level in range(1, 31):
            tol = 360.0 / 2 ** level
            for lng, lat in zip(lngs, lats):
                p = Point(float(lng), float(lat))
                q = point_from_quadkey(quadkey(p, level), level)
                self.assertLessEqual(abs(q.lng - p.lng), tol)
                self.assertLessEqual(abs(q.lat - p.lat), tol)

    def test_tile_interleaving_is_bijective(self) -> None:
        """Every tile of a small grid gets its own key and back."""
        level = 4
        keys = set()
        for x in range(2 ** level):
            for y in range(2 ** level):
                key = quadkey_from_tile(x, y, level)
                self.assertEqual(tile_from_quadkey(key, level), (x, y))
                keys.add(key)

        self.assertEqual(keys, set(range(4 ** level)))

    def test_bounds_contain_point(self) -> None:
        """The tile extent brackets the encoded point."""
        key = quadkey(CHICAGO, 15)
        west, east, south, north = quadkey_bounds(key, 15)

        self.assertTrue(west <= CHICAGO.lng < east)
        self.assertTrue(south < CHICAGO.lat <= north)

    def test_invalid_level_raises(self) -> None:
        """Levels outside [0, 31] are rejected."""
        with self.assertRaises(OutOfRangeError):
            quadkey(CHICAGO, -1)
        with self.assertRaises(OutOfRangeError):
            quadkey(CHICAGO, 32)
        with self.assertRaises(TypeError):
            quadkey(CHICAGO, 2.5)

    def test_non_finite_point_raises(self) -> None:
        for p in (Point(float("nan"), 0.0), Point(float("-inf"), 10.0)):
            with self.assertRaises(OutOfRangeError, msg=repr(p)):
                quadkey(p, 5)
            with self.assertRaises(OutOfRangeError, msg=repr(p)):
                quadkey_string(p, 5)

    def test_invalid_key_raises(self) -> None:
        """Keys not fitting the level are rejected."""
        with self.assertRaises(OutOfRangeError):
            point_from_quadkey(16, 2)
        with self.assertRaises(OutOfRangeError):
            point_from_quadkey(-1, 2)
        with self.assertRaises(OutOfRangeError):
            quadkey_from_tile(4, 0, 2)


class TestQuadkeyString(unittest.TestCase):
    """
    Base-4 string form of the quadkey.
    """

    def test_known_value(self) -> None:
        self.assertEqual(quadkey_string(CHICAGO, 15), "030222231030321")
        self.assertEqual(
            CHICAGO.quadkey_string(15, legacy_padding=True),
            "030222231030321",
        )

    def test_length_equals_level(self) -> None:
        """Padding always yields exactly ``level`` characters."""
        p = Point(-170.0, 80.0)
        self.assertEqual(quadkey(p, 5), 10)
        self.assertEqual(quadkey_string(p, 5), "00022")

        for level in range(0, 31):
            self.assertEqual(len(quadkey_string(CHICAGO, level)), level)

    def test_legacy_padding(self) -> None:
        """The historical rule halves the number of missing zeros."""
        p = Point(-170.0, 80.0)
        self.assertEqual(quadkey_string(p, 5, legacy_padding=True), "0022")
        self.assertEqual(quadkey_to_string(0, 0, legacy_padding=True), "0")
        self.assertEqual(quadkey_to_string(0, 0), "")

    def test_round_trip_cities(self) -> None:
        level = 30
        for lat, lng in CITIES:
            text = quadkey_string(Point(lng, lat), level)
            p = point_from_quadkey_string(text)

            self.assertLess(abs(p.lat - lat), EPSILON)
            self.assertLess(abs(p.lng - lng), EPSILON)

    def test_string_matches_integer(self) -> None:
        for level in (1, 7, 15, 23, 31):
            key = quadkey(CHICAGO, level)
            text = quadkey_string(CHICAGO, level)
            self.assertEqual(quadkey_from_string(text), (key, level))
            self.assertEqual(int(text, 4) if text else 0, key)

    def test_point_constructor(self) -> None:
        a = Point.from_quadkey_string("030222231030321")
        b = Point.from_quadkey(212521785, 15)
        self.assertEqual(a, b)

    def test_invalid_characters_raise(self) -> None:
        with self.assertRaises(InvalidEncodingError):
            point_from_quadkey_string("0304")
        with self.assertRaises(InvalidEncodingError):
            quadkey_from_string("12a")

    def test_too_long_raises(self) -> None:
        with self.assertRaises(OutOfRangeError):
            quadkey_from_string("0" * 32)


if __name__ == "__main__":
    unittest.main()
