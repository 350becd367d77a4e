"""Task translation data models.

Enum integer values are the codes XCSoar stores in its profile file, so
``int(settings.start_type)`` can be written out directly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag

WAYPOINT_INDEX_OFFSET = 10_000
"""Added to the 1-based turnpoint index to form the XCSoar waypoint number."""

UNSET_INDEX = -1


class StartType(IntEnum):
    CIRCLE = 0
    LINE = 1
    SECTOR = 2


class FinishType(IntEnum):
    CIRCLE = 0
    LINE = 1
    SECTOR = 2


class TurnpointSector(IntEnum):
    """Sector type shared by all intermediate turnpoints of a racing task."""

    CIRCLE = 0
    FAI = 1


class AutoAdvanceMode(IntEnum):
    MANUAL = 0
    AUTO = 1
    ARM = 2
    ARM_START = 3


DEFAULT_AUTO_ADVANCE = AutoAdvanceMode.ARM_START
"""Used when the existing profile has no (or a malformed) ``AutoAdvance`` value."""


class TaskPointSector(Enum):
    """Per-slot sector geometry of a :class:`TaskPoint`."""

    UNSET = "unset"
    CIRCLE = "circle"
    FAI = "fai"
    AAT_CIRCLE = "aat_circle"
    AAT_SECTOR = "aat_sector"


class WaypointFlag(IntFlag):
    AIRPORT = 0x01
    TURNPOINT = 0x02
    LANDPOINT = 0x04
    HOME = 0x08
    START = 0x10
    FINISH = 0x20
    RESTRICTED = 0x40
    WAYPOINTFLAG = 0x80


class Severity(Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class GeoPoint:
    """A geographic position in signed degrees."""

    longitude: float
    """Degrees, positive = east."""

    latitude: float
    """Degrees, positive = north."""

    @classmethod
    def from_landscape(cls, converter, x: float, y: float) -> GeoPoint:
        """Convert a Condor landscape position with a coordinate *converter*."""
        return cls(longitude=converter.longitude(x, y), latitude=converter.latitude(x, y))


@dataclass(frozen=True)
class Waypoint:
    """A task turnpoint as stored in the XCSoar waypoint list."""

    number: int
    """``WAYPOINT_INDEX_OFFSET`` + 1-based turnpoint index."""

    position: GeoPoint
    altitude: float
    """Metres AMSL."""

    flags: WaypointFlag
    name: str
    """Display name with role prefix (``S:``, ``F:`` or ``<n>:``)."""

    comment: str
    """Original Condor turnpoint name."""

    in_task: bool = True


@dataclass
class TaskPoint:
    """One task slot.

    A fresh instance is the "unset" sentinel: no waypoint linked and a
    full-circle radial range.
    """

    index: int = UNSET_INDEX
    sector_type: TaskPointSector = TaskPointSector.UNSET
    sector_radius: float = 0.0
    aat_start_radial: int = 0
    aat_finish_radial: int = 360

    @property
    def is_set(self) -> bool:
        return self.index != UNSET_INDEX


@dataclass
class StartPoint:
    """Alternate start slot. Condor tasks never fill these."""

    index: int = UNSET_INDEX


@dataclass
class TaskSettings:
    """Task-wide settings accumulated during the translation pass."""

    aat_enabled: bool = False
    aat_minutes: int = 0
    auto_advance: AutoAdvanceMode = DEFAULT_AUTO_ADVANCE
    start_type: StartType = StartType.CIRCLE
    finish_type: FinishType = FinishType.CIRCLE
    sector_type: TurnpointSector = TurnpointSector.CIRCLE
    start_radius: float = 0.0
    finish_radius: float = 0.0
    sector_radius: float = 0.0
    start_max_height: float = 0.0
    finish_min_height: float = 0.0
    """Always 0: XCSoar only supports an AGL finish height."""


@dataclass(frozen=True)
class Issue:
    """A message produced while translating, in the order it was raised."""

    severity: Severity
    message: str


@dataclass(frozen=True)
class AirspaceRecord:
    """A penalty zone as an OpenAir polygon."""

    label: str
    top: float
    """Ceiling in metres AMSL."""

    base: float
    """Floor in metres AMSL; 0 means ground."""

    corners: tuple[GeoPoint, GeoPoint, GeoPoint, GeoPoint]


@dataclass
class TaskTranslation:
    """Everything one task translation produces."""

    settings: TaskSettings
    task_points: list[TaskPoint]
    start_points: list[StartPoint]
    waypoints: list[Waypoint]
    waypoint_lines: list[str] = field(default_factory=list)
    """Lines of the XCSoar waypoint file (empty if not requested)."""

    issues: list[Issue] = field(default_factory=list)
    tps_valid: bool = True

    @property
    def warnings(self) -> list[str]:
        return [i.message for i in self.issues if i.severity is Severity.WARNING]

    def profile_values(self) -> list[tuple[str, str]]:
        """Return the XCSoar profile ``(key, value)`` pairs for the task settings."""
        s = self.settings
        return [
            ("StartLine", str(int(s.start_type))),
            ("StartMaxHeight", _num(s.start_max_height)),
            ("StartMaxHeightMargin", "0"),
            ("StartHeightRef", "1"),  # AMSL
            ("StartRadius", _num(s.start_radius)),
            ("StartMaxSpeed", "0"),
            ("StartMaxSpeedMargin", "0"),
            ("FAISector", str(int(s.sector_type))),
            ("Radius", _num(s.sector_radius)),
            ("FinishLine", str(int(s.finish_type))),
            ("FinishMinHeight", _num(s.finish_min_height)),
            ("FinishRadius", _num(s.finish_radius)),
            ("FAIFinishHeight", _num(s.finish_min_height)),
            ("AutoAdvance", str(int(s.auto_advance))),
            ("AATEnabled", "1" if s.aat_enabled else "0"),
            ("AATTaskLength", str(s.aat_minutes)),
        ]


@dataclass
class TranslateOptions:
    """Per-call translation configuration.

    Args:
        aat_minutes: Minimum AAT time. ``None`` derives it from the task's
            game options; 0 disables AAT.
        max_task_points: Number of task slots the target format stores.
        max_start_points: Number of alternate start slots.
        generate_waypoint_file: Whether to produce waypoint-file lines.
        auto_advance: Raw ``AutoAdvance`` text from the existing profile.
        path_prefix: Directory prefix (as seen by XCSoar) for file references.
    """

    aat_minutes: int | None = None
    max_task_points: int = 10
    max_start_points: int = 10
    generate_waypoint_file: bool = True
    auto_advance: str | None = None
    path_prefix: str = ""

    @classmethod
    def from_env(cls, **overrides) -> TranslateOptions:
        """Build options from ``CONDOR2NAV_*`` environment variables.

        Keyword arguments that are not ``None`` win over the environment.
        """
        env_aat = os.environ.get("CONDOR2NAV_AAT_MINUTES")
        opts = cls(
            aat_minutes=int(env_aat) if env_aat else None,
            max_task_points=int(os.environ.get("CONDOR2NAV_MAX_TASK_POINTS", "10")),
            max_start_points=int(os.environ.get("CONDOR2NAV_MAX_START_POINTS", "10")),
            generate_waypoint_file=os.environ.get("CONDOR2NAV_WP_FILE", "1") != "0",
            path_prefix=os.environ.get("CONDOR2NAV_PATH_PREFIX", ""),
        )
        for key, value in overrides.items():
            if value is not None:
                setattr(opts, key, value)
        return opts


def _num(value: float) -> str:
    """Format a metre value the way the profile stores it (no trailing ``.0``)."""
    return str(int(value)) if float(value).is_integer() else f"{value:g}"
