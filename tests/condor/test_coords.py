"""Tests for FlatEarthConverter."""

from __future__ import annotations

import math

import pytest

from condor2nav.condor.coords import EARTH_RADIUS_M, FlatEarthConverter

_M_PER_DEG = EARTH_RADIUS_M * math.pi / 180.0


def test_origin_maps_to_origin():
    conv = FlatEarthConverter(46.0, 14.0)
    assert conv.latitude(0.0, 0.0) == pytest.approx(46.0)
    assert conv.longitude(0.0, 0.0) == pytest.approx(14.0)


def test_y_points_north():
    conv = FlatEarthConverter(46.0, 14.0)
    assert conv.latitude(0.0, _M_PER_DEG) == pytest.approx(47.0)
    assert conv.longitude(0.0, _M_PER_DEG) == pytest.approx(14.0)


def test_x_points_east_scaled_by_latitude():
    conv = FlatEarthConverter(60.0, 10.0)
    # at 60 degrees a degree of longitude is half as long
    assert conv.longitude(_M_PER_DEG / 2.0, 0.0) == pytest.approx(11.0)
    assert conv.latitude(_M_PER_DEG / 2.0, 0.0) == pytest.approx(60.0)


def test_longitude_wraps_at_antimeridian():
    conv = FlatEarthConverter(0.0, 179.5)
    assert conv.longitude(_M_PER_DEG, 0.0) == pytest.approx(-179.5)


@pytest.mark.parametrize("lat", [90.0, -90.0, 120.0])
def test_invalid_origin_rejected(lat):
    with pytest.raises(ValueError):
        FlatEarthConverter(lat, 0.0)
