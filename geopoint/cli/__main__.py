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

import argparse
import logging
import sys
from geopoint.cli import geohash
from geopoint.cli import quadkey

logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)

def main(argv=None):
    """
    Entry point of the ``geopoint`` command. Returns the exit status.
    """
    parser = argparse.ArgumentParser(
        description='GeoPoint: quadkey and geohash spatial keys.'
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print informative log messages')

    subparsers = parser.add_subparsers(
        dest='command',
        help='Choose a functionality'
    )

    # Add subparser for geohash with detailed help
    geohash_parser = subparsers.add_parser(
        'geohash',
        help='Encode/decode base-32 geohashes.'
    )
    geohash.setup_parser(geohash_parser)

    # Add subparser for quadkey with detailed help
    quadkey_parser = subparsers.add_parser(
        'quadkey',
        help='Encode/decode Bing Maps quadkeys.'
    )
    quadkey.setup_parser(quadkey_parser)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger('geopoint').setLevel(logging.INFO)

    if args.command == 'geohash':
        ok = geohash.run(args)
    elif args.command == 'quadkey':
        ok = quadkey.run(args)
    else:
        parser.print_help()
        return 1

    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
