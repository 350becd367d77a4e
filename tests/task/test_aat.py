"""Tests for bisector and AatCorridorBuilder."""

from __future__ import annotations

import pytest

from condor2nav.task.aat import AatCorridorBuilder, bisector
from condor2nav.task.models import GeoPoint, TaskPoint, TaskPointSector


@pytest.mark.parametrize(
    "a1, a2, expected",
    [
        (90, 90, 90),
        (80, 100, 90),
        (91, 94, 93),
        (0, 180, 90),
        (10, 350, 0),
        (0, 270, 315),
    ],
)
def test_bisector(a1, a2, expected):
    assert bisector(a1, a2) == expected


@pytest.fixture
def builder():
    return AatCorridorBuilder()


def test_full_circle_becomes_aat_circle(builder):
    slot = TaskPoint(index=10002)
    result = builder.build(slot, 360, 20000.0, GeoPoint(0.0, -1.0), GeoPoint(0.0, 0.0), GeoPoint(1.0, 0.0))
    assert result is slot
    assert slot.sector_type is TaskPointSector.AAT_CIRCLE
    assert slot.sector_radius == 20000.0
    assert slot.aat_start_radial == 0
    assert slot.aat_finish_radial == 360
    assert slot.index == 10002


def test_sector_faces_away_from_the_turn(builder):
    # inbound from the south, outbound to the east: open side is north-west
    slot = TaskPoint(index=10002)
    builder.build(slot, 90, 5000.0, GeoPoint(0.0, -1.0), GeoPoint(0.0, 0.0), GeoPoint(1.0, 0.0))
    assert slot.sector_type is TaskPointSector.AAT_SECTOR
    assert slot.sector_radius == 5000.0
    assert slot.aat_start_radial == 270
    assert slot.aat_finish_radial == 0


def test_sector_width_matches_condor_angle(builder):
    slot = TaskPoint(index=10002)
    builder.build(slot, 180, 3000.0, GeoPoint(0.0, -1.0), GeoPoint(0.0, 0.0), GeoPoint(1.0, 0.0))
    assert (slot.aat_finish_radial - slot.aat_start_radial) % 360 == 180


def test_out_and_return_centres_on_common_bearing(builder):
    # previous and next both south of the turnpoint: both bearings are 0
    slot = TaskPoint(index=10002)
    builder.build(slot, 90, 1000.0, GeoPoint(0.0, -1.0), GeoPoint(0.0, 0.0), GeoPoint(0.0, -2.0))
    assert slot.aat_start_radial == 315
    assert slot.aat_finish_radial == 45
