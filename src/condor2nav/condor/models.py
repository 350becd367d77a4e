"""Condor task data models (source side of the translation)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class SectorShape(IntEnum):
    """Values of Condor's ``TPSectorType<i>`` key."""

    CLASSIC = 0
    """Angle/radius sector (90, 180, 270 or 360 degrees)."""

    WINDOW = 1
    """Rectangular window the glider has to fly through."""


@dataclass(frozen=True)
class SourceTurnpoint:
    """A turnpoint as stored in a Condor flight plan.

    Coordinates are Condor landscape coordinates in metres.
    """

    name: str
    x: float
    y: float
    z: float
    """Terrain elevation in metres."""

    sector_type: int
    """Raw ``TPSectorType`` code; see :class:`SectorShape`."""

    radius: float
    angle: int
    width: float = 0.0
    """Declared minimum altitude (``TPWidth``); 0 when not set."""

    height: float = 0.0
    """Maximum height (``TPHeight``), used as start maximum height."""


@dataclass(frozen=True)
class SourcePenaltyZone:
    """A Condor penalty zone: a quadrilateral with a floor and a ceiling."""

    top: float
    base: float
    corners: tuple[tuple[float, float], ...]
    """Four ``(x, y)`` landscape positions in Condor's order."""


@dataclass
class SourceTask:
    """A parsed Condor flight-plan task.

    ``turnpoints[0]`` is the launch airfield and is never part of the
    translated task.
    """

    turnpoints: list[SourceTurnpoint]
    penalty_zones: list[SourcePenaltyZone] = field(default_factory=list)
    aat_enabled: bool = False
    aat_hours: float = 0.0
