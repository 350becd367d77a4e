"""Task and penalty-zone translation engine.

Public API
----------
TaskTranslator         - Condor task → XCSoar task settings and records
SectorNormalizer       - folds turnpoint sectors into shared XCSoar settings
AatCorridorBuilder     - AAT circle / sector radials for intermediate turnpoints
PenaltyZoneTranslator  - penalty zones → airspace polygons
waypoint_bearing       - great-circle bearing between two points
TaskTranslation        - result of one translation (records + issues)
TranslationError       - base class of fatal translation errors
"""

from condor2nav.task.aat import AatCorridorBuilder
from condor2nav.task.bearing import waypoint_bearing
from condor2nav.task.errors import CapacityExceeded, TranslationError, UnsupportedSectorShape
from condor2nav.task.models import (
    AirspaceRecord,
    GeoPoint,
    Issue,
    TaskPoint,
    TaskSettings,
    TaskTranslation,
    TranslateOptions,
    Waypoint,
)
from condor2nav.task.penalty import PenaltyZoneTranslator
from condor2nav.task.sector import SectorNormalizer
from condor2nav.task.translator import TaskTranslator

__all__ = [
    "AatCorridorBuilder",
    "AirspaceRecord",
    "CapacityExceeded",
    "GeoPoint",
    "Issue",
    "PenaltyZoneTranslator",
    "SectorNormalizer",
    "TaskPoint",
    "TaskSettings",
    "TaskTranslation",
    "TaskTranslator",
    "TranslateOptions",
    "TranslationError",
    "UnsupportedSectorShape",
    "Waypoint",
    "waypoint_bearing",
]
