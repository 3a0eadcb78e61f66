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
Default settings and limits for the GeoPoint codecs.

Settings
--------
GEOHASH_PRECISION = default number of characters of a geohash string
GEOHASH_MAX_PRECISION = longest geohash string whose bits fit a signed
                        64-bit integer (5 bits per character)
GEOHASH_MAX_BITS = largest bit count accepted by the integer geohash
QUADKEY_DEFAULT_LEVEL = zoom level used when none is given (CLI)
QUADKEY_MAX_LEVEL = deepest quadtree level (2 bits per level)
MERCATOR_SIN_LIMIT = bound on sin(latitude) before the Mercator
                     projection, avoids the singularity at the poles
"""

# geohash
GEOHASH_PRECISION = 12
GEOHASH_MAX_PRECISION = 12
GEOHASH_MAX_BITS = 63

# quadkey
QUADKEY_DEFAULT_LEVEL = 30
QUADKEY_MAX_LEVEL = 31

# projection
MERCATOR_SIN_LIMIT = 0.9999
