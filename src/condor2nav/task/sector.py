"""Sector normalization — maps Condor turnpoint sectors onto XCSoar's vocabulary.

XCSoar describes a racing task with one start type, one finish type and a
single sector type/radius shared by every intermediate turnpoint. Condor
gives each turnpoint its own angle and radius. :class:`SectorNormalizer`
folds the Condor turnpoints one by one into a :class:`SectorState`,
recording an :class:`~condor2nav.task.models.Issue` whenever the result is
only an approximation of the Condor task.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from condor2nav.condor.models import SectorShape, SourceTurnpoint
from condor2nav.task.errors import UnsupportedSectorShape
from condor2nav.task.models import (
    FinishType,
    Issue,
    Severity,
    StartType,
    TaskSettings,
    TurnpointSector,
)

TARGET_NAME = "XCSoar"

_START_TYPES = {90: StartType.SECTOR, 180: StartType.LINE, 360: StartType.CIRCLE}
_FINISH_TYPES = {90: FinishType.SECTOR, 180: FinishType.LINE, 360: FinishType.CIRCLE}
_INTERMEDIATE_TYPES = {90: TurnpointSector.FAI, 180: TurnpointSector.FAI, 360: TurnpointSector.CIRCLE}

_SECTOR_LABEL = {TurnpointSector.FAI: "FAI", TurnpointSector.CIRCLE: "circle"}

INCONSISTENT_SECTORS_WARNING = (
    f"WARNING: {TARGET_NAME} does not support different TPs types. "
    "A single sector type and radius is used for all intermediate sectors. "
    "You may need to manually advance a waypoint after reaching it in Condor."
)


class Role(Enum):
    START = "start"
    FINISH = "finish"
    INTERMEDIATE = "intermediate"

    @classmethod
    def of(cls, index: int, last_index: int) -> Role:
        """Role of the turnpoint at 1-based *index* in a task ending at *last_index*."""
        if index == 1:
            return cls.START
        if index == last_index:
            return cls.FINISH
        return cls.INTERMEDIATE


@dataclass(frozen=True)
class SectorState:
    """Accumulator threaded through :meth:`SectorNormalizer.apply`.

    ``pinned`` becomes True once an intermediate turnpoint has established the
    shared sector type and radius; later intermediates are checked against it.
    """

    settings: TaskSettings
    tps_valid: bool = True
    pinned: bool = False
    issues: tuple[Issue, ...] = ()

    def warn(self, message: str) -> SectorState:
        return replace(self, issues=self.issues + (Issue(Severity.WARNING, message),))


class SectorNormalizer:
    """Fold Condor turnpoint sectors into XCSoar task settings.

    Angles 90, 180, 270 and 360 are understood; 270 is approximated by a
    circle. Any other angle leaves the sector settings untouched.
    """

    def apply(
        self,
        state: SectorState,
        turnpoint: SourceTurnpoint,
        name: str,
        index: int,
        last_index: int,
    ) -> SectorState:
        """Return the state after processing one turnpoint.

        Args:
            state: State after the previous turnpoint.
            turnpoint: Condor turnpoint at *index*.
            name: Display name used in messages (e.g. ``"2:Lesce"``).
            index: 1-based turnpoint index (0 is the launch point).
            last_index: Index of the finish turnpoint.

        Raises:
            UnsupportedSectorShape: For an unknown sector-shape code.
        """
        if turnpoint.sector_type == SectorShape.WINDOW:
            return state.warn(
                f"WARNING: {name}: {TARGET_NAME} does not support window TP type. "
                "Circle TP will be used and you are responsible for reaching it "
                "on correct height and with correct heading."
            )
        if turnpoint.sector_type != SectorShape.CLASSIC:
            raise UnsupportedSectorShape(turnpoint.sector_type, name)

        angle = turnpoint.angle
        if angle == 270:
            state = state.warn(
                f"WARNING: {name}: {TARGET_NAME} does not support TP with angle '270'. "
                "Circle sector will be used instead. Be careful to advance a waypoint "
                f"in Condor after it has been advanced by the {TARGET_NAME}."
            )
            angle = 360

        role = Role.of(index, last_index)
        settings = state.settings
        if role is Role.START:
            if angle in _START_TYPES:
                settings = replace(settings, start_type=_START_TYPES[angle])
            settings = replace(
                settings,
                start_radius=turnpoint.radius,
                start_max_height=turnpoint.height,
            )
            return replace(state, settings=settings)
        if role is Role.FINISH:
            if angle in _FINISH_TYPES:
                settings = replace(settings, finish_type=_FINISH_TYPES[angle])
            # AGL only in XCSoar, Condor gives AMSL
            settings = replace(settings, finish_radius=turnpoint.radius, finish_min_height=0)
            return replace(state, settings=settings)

        if angle not in _INTERMEDIATE_TYPES:
            return state
        if angle == 180:
            state = state.warn(
                f"WARNING: {name}: {TARGET_NAME} does not support line TP type. "
                "FAI Sector will be used instead. You may need to manually advance "
                "a waypoint after reaching it in Condor."
            )
            if state.pinned:
                # shared sector keeps its type and radius
                return replace(state, tps_valid=False)
        return self._fold_intermediate(state, _INTERMEDIATE_TYPES[angle], turnpoint.radius, name)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _fold_intermediate(
        self,
        state: SectorState,
        sector: TurnpointSector,
        radius: float,
        name: str,
    ) -> SectorState:
        settings = state.settings
        if not state.pinned:
            return replace(
                state,
                settings=replace(settings, sector_type=sector, sector_radius=radius),
                pinned=True,
            )

        if sector != settings.sector_type:
            # first established type wins; reported once at the end of the pass
            return replace(
                state,
                settings=replace(settings, sector_radius=min(settings.sector_radius, radius)),
                tps_valid=False,
            )

        if radius != settings.sector_radius:
            state = state.warn(
                f"WARNING: {name}: {TARGET_NAME} does not support different TPs types. "
                f"The smallest radius will be used for all {_SECTOR_LABEL[sector]} sectors. "
                f"If you advance a sector in {TARGET_NAME} you will advance it in Condor."
            )
            return replace(
                state,
                settings=replace(settings, sector_radius=min(settings.sector_radius, radius)),
                tps_valid=False,
            )
        return state

    def finish(self, state: SectorState) -> SectorState:
        """Add the aggregated consistency warning if the pass forced a uniform sector."""
        if state.tps_valid:
            return state
        return state.warn(INCONSISTENT_SECTORS_WARNING)
