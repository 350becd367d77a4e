"""Penalty zones → airspace polygons."""

from __future__ import annotations

from pathlib import PureWindowsPath

from condor2nav.condor.models import SourcePenaltyZone
from condor2nav.task.models import AirspaceRecord, GeoPoint

AIRSPACES_FILE_NAME = "Condor.txt"

EMPTY_FILE_REFERENCE = '""'
"""Profile value that clears XCSoar's airspace file setting."""


def airspace_file_reference(zones: list[SourcePenaltyZone], path_prefix: str = "") -> str:
    """Return the quoted ``AirspaceFile`` profile value for *zones*.

    XCSoar keeps the previous file when the key is missing, so a task without
    penalty zones writes an empty reference instead of omitting it.
    """
    if not zones:
        return EMPTY_FILE_REFERENCE
    path = PureWindowsPath(path_prefix) / AIRSPACES_FILE_NAME if path_prefix else AIRSPACES_FILE_NAME
    return f'"{path}"'


class PenaltyZoneTranslator:
    """Convert Condor penalty zones into :class:`AirspaceRecord` polygons.

    Corners keep Condor's order; Condor guarantees a valid quadrilateral.
    """

    def __init__(self, converter) -> None:
        self._converter = converter

    def translate(self, zones: list[SourcePenaltyZone]) -> list[AirspaceRecord]:
        return [self._record(i, zone) for i, zone in enumerate(zones)]

    def _record(self, i: int, zone: SourcePenaltyZone) -> AirspaceRecord:
        corners = tuple(GeoPoint.from_landscape(self._converter, x, y) for x, y in zone.corners)
        return AirspaceRecord(
            label=f"Penalty Zone {i + 1}",
            top=zone.top,
            base=zone.base,
            corners=corners,
        )
