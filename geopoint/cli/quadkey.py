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

from geopoint.config import QUADKEY_DEFAULT_LEVEL
from geopoint.errors import GeoPointError
from geopoint.primitives import Point
from geopoint.quadkey import (
    point_from_quadkey_string,
    quadkey,
    quadkey_string,
)

logger = logging.getLogger(__name__)

def setup_parser(parser):
    actions = parser.add_subparsers(dest='action',
                                    help='Encode or decode a quadkey')

    encode_parser = actions.add_parser('encode',
                                       help='Encode a location as quadkey')
    encode_parser.add_argument('lng', type=float,
                               help='Longitude in decimal degrees')
    encode_parser.add_argument('lat', type=float,
                               help='Latitude in decimal degrees')
    encode_parser.add_argument('-l', '--level', type=int,
                               default=QUADKEY_DEFAULT_LEVEL,
                               help='Zoom level (default: %(default)s)')
    encode_parser.add_argument('-i', '--integer', action='store_true',
                               help='Print the integer key instead of '
                                    'the base-4 string')

    decode_parser = actions.add_parser('decode',
                                       help='Decode a base-4 quadkey to '
                                            'the north-west tile corner')
    decode_parser.add_argument('key', type=str,
                               help='Quadkey string (e.g. "0302")')

def run(args):
    """
    Execute the quadkey sub-command. Returns True on success.
    """
    try:
        if args.action == 'encode':
            point = Point(args.lng, args.lat)
            logger.info(f"Encoding ({args.lng}, {args.lat}) "
                        f"at level {args.level}")
            if args.integer:
                print(quadkey(point, args.level))
            else:
                print(quadkey_string(point, args.level))

        elif args.action == 'decode':
            point = point_from_quadkey_string(args.key)
            print(f"{point.lng} {point.lat}")

        else:
            logger.error("No quadkey action given (encode/decode)")
            return False

        return True

    except GeoPointError as e:
        logger.error(f"Quadkey {args.action} failed: {e}")
        return False
