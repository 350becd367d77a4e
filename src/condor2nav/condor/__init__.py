"""Condor flight-plan input."""

from condor2nav.condor.coords import CoordConverter, FlatEarthConverter
from condor2nav.condor.models import SectorShape, SourcePenaltyZone, SourceTask, SourceTurnpoint
from condor2nav.condor.parser import CondorTaskParser, TaskFormatError

__all__ = [
    "CondorTaskParser",
    "CoordConverter",
    "FlatEarthConverter",
    "SectorShape",
    "SourcePenaltyZone",
    "SourceTask",
    "SourceTurnpoint",
    "TaskFormatError",
]
