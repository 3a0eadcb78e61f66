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
Exceptions raised by the GeoPoint codecs.

Both concrete errors also derive from :class:`ValueError`, so callers
that only care about bad input can keep catching the builtin type.
"""


class GeoPointError(Exception):
    """Base class for all GeoPoint errors."""


class InvalidEncodingError(GeoPointError, ValueError):
    """
    Raised when an encoded value cannot be decoded.

    Typical causes are a geohash containing a character outside the
    base-32 alphabet, a quadkey string with a digit other than 0-3,
    or a WKT text that does not describe a point.
    """


class OutOfRangeError(GeoPointError, ValueError):
    """
    Raised when a level, bit count, precision or key falls outside the
    range supported by a 64-bit signed integer encoding.
    """
