"""Tests for PenaltyZoneTranslator and the airspace file reference."""

from __future__ import annotations

import pytest

from condor2nav.condor.models import SourcePenaltyZone
from condor2nav.task.models import GeoPoint
from condor2nav.task.penalty import (
    EMPTY_FILE_REFERENCE,
    PenaltyZoneTranslator,
    airspace_file_reference,
)

_SQUARE = ((14.0, 46.0), (14.1, 46.0), (14.1, 46.1), (14.0, 46.1))


@pytest.fixture
def zones():
    return [
        SourcePenaltyZone(top=2500.0, base=0.0, corners=_SQUARE),
        SourcePenaltyZone(top=3000.0, base=1200.0, corners=tuple(reversed(_SQUARE))),
    ]


def test_no_zones_gives_no_records(converter):
    assert PenaltyZoneTranslator(converter).translate([]) == []


def test_records_are_labelled_in_order(converter, zones):
    records = PenaltyZoneTranslator(converter).translate(zones)
    assert [r.label for r in records] == ["Penalty Zone 1", "Penalty Zone 2"]
    assert (records[0].top, records[0].base) == (2500.0, 0.0)
    assert (records[1].top, records[1].base) == (3000.0, 1200.0)


def test_corner_order_is_preserved(converter, zones):
    records = PenaltyZoneTranslator(converter).translate(zones)
    assert records[0].corners == tuple(GeoPoint(longitude=x, latitude=y) for x, y in _SQUARE)
    assert records[1].corners[0] == GeoPoint(longitude=14.0, latitude=46.1)


def test_empty_reference_without_zones():
    assert airspace_file_reference([]) == EMPTY_FILE_REFERENCE == '""'
    assert airspace_file_reference([], "XCSoarData") == '""'


def test_reference_without_prefix(zones):
    assert airspace_file_reference(zones) == '"Condor.txt"'


def test_reference_joins_windows_prefix(zones):
    assert airspace_file_reference(zones, "XCSoarData\\Condor") == '"XCSoarData\\Condor\\Condor.txt"'
