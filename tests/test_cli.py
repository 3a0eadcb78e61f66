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
Command line interface - TEST
"""
import logging

import pytest

from geopoint.cli.__main__ import main


def _output(capsys):
    return capsys.readouterr().out.strip().splitlines()

def test_geohash_encode(capsys):
    assert main(['geohash', 'encode', '9.85', '57.097', '-p', '8']) == 0
    assert _output(capsys) == ['u4phb4hw']

def test_geohash_encode_negative_longitude(capsys):
    assert main(['geohash', 'encode', '-122.32', '49.03', '-p', '10']) == 0
    assert _output(capsys) == ['c29nbt9k3q']

def test_geohash_decode_with_bounds(capsys):
    assert main(['geohash', 'decode', 'u4phb4hw', '--bounds']) == 0
    lines = _output(capsys)
    assert len(lines) == 2

    lng, lat = map(float, lines[0].split())
    assert lng == pytest.approx(9.85, abs=1e-3)
    assert lat == pytest.approx(57.097, abs=1e-3)
    assert len(lines[1].split()) == 4

def test_geohash_decode_invalid(capsys, caplog):
    with caplog.at_level(logging.ERROR):
        assert main(['geohash', 'decode', 'u4pa']) == 1
    assert _output(capsys) == []
    assert 'Invalid geohash character' in caplog.text

def test_geohash_encode_out_of_range():
    assert main(['geohash', 'encode', '0', '0', '-p', '20']) == 1

def test_quadkey_encode(capsys):
    argv = ['quadkey', 'encode', '-l', '15', '-87.65005229999997', '41.850033']
    assert main(argv) == 0
    assert _output(capsys) == ['030222231030321']

    assert main(argv + ['--integer']) == 0
    assert _output(capsys) == ['212521785']

def test_quadkey_decode(capsys):
    assert main(['quadkey', 'decode', '030222231030321']) == 0
    lng, lat = map(float, _output(capsys)[0].split())
    assert lng == pytest.approx(-87.65005229999997, abs=0.011)
    assert lat == pytest.approx(41.850033, abs=0.011)

def test_quadkey_decode_invalid():
    assert main(['quadkey', 'decode', '0309']) == 1

def test_no_command(capsys):
    assert main([]) == 1
    assert 'usage' in capsys.readouterr().out

def test_no_action():
    assert main(['quadkey']) == 1
