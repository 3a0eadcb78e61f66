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

import logging

from geopoint.config import GEOHASH_PRECISION
from geopoint.errors import GeoPointError
from geopoint.geohash import geohash, point_from_geohash, ranges_from_geohash
from geopoint.primitives import Point

logger = logging.getLogger(__name__)

def setup_parser(parser):
    actions = parser.add_subparsers(dest='action',
                                    help='Encode or decode a geohash')

    encode_parser = actions.add_parser('encode',
                                       help='Encode a location as geohash')
    encode_parser.add_argument('lng', type=float,
                               help='Longitude in decimal degrees')
    encode_parser.add_argument('lat', type=float,
                               help='Latitude in decimal degrees')
    encode_parser.add_argument('-p', '--precision', type=int,
                               default=GEOHASH_PRECISION,
                               help='Number of characters (default: %(default)s)')

    decode_parser = actions.add_parser('decode',
                                       help='Decode a geohash to its center')
    decode_parser.add_argument('hash', type=str,
                               help='Geohash string (e.g. "u4phb4hw")')
    decode_parser.add_argument('-b', '--bounds', action='store_true',
                               help='Also print the cell bounds')

def run(args):
    """
    Execute the geohash sub-command. Returns True on success.
    """
    try:
        if args.action == 'encode':
            logger.info(f"Encoding ({args.lng}, {args.lat}) "
                        f"with precision {args.precision}")
            print(geohash(Point(args.lng, args.lat), args.precision))

        elif args.action == 'decode':
            point = point_from_geohash(args.hash)
            print(f"{point.lng} {point.lat}")
            if args.bounds:
                print("{} {} {} {}".format(*ranges_from_geohash(args.hash)))

        else:
            logger.error("No geohash action given (encode/decode)")
            return False

        return True

    except GeoPointError as e:
        logger.error(f"Geohash {args.action} failed: {e}")
        return False
