"""XCSoar text formats — coordinates, waypoint-file lines and OpenAir airspace.

Waypoint files use the WinPilot/Cambridge ``.dat`` grammar
(``DD:MM.FFFN`` / ``DDD:MM.FFFE``); airspace files use OpenAir with
``DD:MM:SS N`` / ``DDD:MM:SS E`` points.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from condor2nav.task.models import AirspaceRecord, GeoPoint

AIRSPACE_HEADER: tuple[str, ...] = (
    "*******************************************************",
    "* Condor Task Penalty Zones generated with Condor2Nav *",
    "*******************************************************",
)


def _split_minutes(value: float, decimals: int) -> tuple[int, float]:
    """Return ``(degrees, minutes)`` of ``abs(value)`` with minutes rounded to *decimals*.

    Carries into the degrees when rounding reaches 60 minutes.
    """
    value = abs(value)
    degrees = int(value)
    minutes = round((value - degrees) * 60.0, decimals)
    if minutes >= 60.0:
        degrees += 1
        minutes = 0.0
    return degrees, minutes


def _split_seconds(value: float) -> tuple[int, int, int]:
    """Return ``(degrees, minutes, seconds)`` of ``abs(value)`` rounded to whole seconds."""
    total = int(abs(value) * 3600.0 + 0.5)
    degrees, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return degrees, minutes, seconds


def format_latitude_ddmmff(latitude: float) -> str:
    """``46:12.345N`` style latitude."""
    deg, minutes = _split_minutes(latitude, 3)
    return f"{deg:02d}:{minutes:06.3f}{'N' if latitude >= 0 else 'S'}"


def format_longitude_ddmmff(longitude: float) -> str:
    """``014:01.250E`` style longitude."""
    deg, minutes = _split_minutes(longitude, 3)
    return f"{deg:03d}:{minutes:06.3f}{'E' if longitude >= 0 else 'W'}"


def format_latitude_ddmmss(latitude: float) -> str:
    """``46:12:20 N`` style latitude."""
    deg, minutes, seconds = _split_seconds(latitude)
    return f"{deg:02d}:{minutes:02d}:{seconds:02d} {'N' if latitude >= 0 else 'S'}"


def format_longitude_ddmmss(longitude: float) -> str:
    """``014:01:15 E`` style longitude."""
    deg, minutes, seconds = _split_seconds(longitude)
    return f"{deg:03d}:{minutes:02d}:{seconds:02d} {'E' if longitude >= 0 else 'W'}"


def format_altitude(value: float) -> str:
    """Shortest decimal form of a metre value (``350``, ``350.5``)."""
    return f"{value:g}"


def waypoint_line(index: int, position: GeoPoint, altitude: float, name: str, comment: str) -> str:
    """One turnpoint line of the XCSoar waypoint file."""
    return (
        f"{index},{format_latitude_ddmmff(position.latitude)},"
        f"{format_longitude_ddmmff(position.longitude)},"
        f"{format_altitude(altitude)}M,T,{name},{comment}"
    )


def airspace_lines(records: list[AirspaceRecord]) -> list[str]:
    """Return the OpenAir file content for *records* (header included)."""
    lines = list(AIRSPACE_HEADER)
    for record in records:
        lines.append("")
        lines.append("AC P")
        lines.append(f"AN {record.label}")
        lines.append(f"AH {format_altitude(record.top)}m AMSL")
        if record.base == 0:
            lines.append("AL 0")
        else:
            lines.append(f"AL {format_altitude(record.base)}m AMSL")
        for corner in record.corners:
            lines.append(
                f"DP {format_latitude_ddmmss(corner.latitude)} "
                f"{format_longitude_ddmmss(corner.longitude)}"
            )
    return lines
