"""TaskTranslator — turns a Condor task into XCSoar task records.

One call to :meth:`TaskTranslator.translate` makes a single pass over the
Condor turnpoints (the launch point at index 0 is skipped):

1. derive the display name and geographic position of the turnpoint,
2. emit the waypoint-file line and the :class:`Waypoint` record,
3. link the waypoint into its :class:`TaskPoint` slot,
4. compute the sector geometry: the AAT corridor for intermediate AAT
   turnpoints, otherwise the shared start/finish/sector settings.

Translation has no output side effects; everything is returned on a
:class:`TaskTranslation`.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from condor2nav.condor.models import SectorShape, SourceTask
from condor2nav.task.aat import AatCorridorBuilder
from condor2nav.task.errors import CapacityExceeded, UnsupportedSectorShape
from condor2nav.task.models import (
    DEFAULT_AUTO_ADVANCE,
    WAYPOINT_INDEX_OFFSET,
    AutoAdvanceMode,
    GeoPoint,
    StartPoint,
    TaskPoint,
    TaskSettings,
    TaskTranslation,
    TranslateOptions,
    Waypoint,
    WaypointFlag,
)
from condor2nav.task.sector import SectorNormalizer, SectorState
from condor2nav.xcsoar.formatter import waypoint_line

_logger = logging.getLogger(__name__)


def parse_auto_advance(raw: str | None) -> AutoAdvanceMode:
    """Return the auto-advance mode stored in a profile, or the default.

    Absent, non-numeric and out-of-range values fall back to
    :data:`~condor2nav.task.models.DEFAULT_AUTO_ADVANCE`.
    """
    if raw is None:
        return DEFAULT_AUTO_ADVANCE
    try:
        return AutoAdvanceMode(int(raw.strip()))
    except ValueError:
        return DEFAULT_AUTO_ADVANCE


def display_name(name: str, index: int, last_index: int) -> str:
    """Prefix a turnpoint name with its role: ``S:``, ``F:`` or ``<n>:``."""
    if index == 1:
        return f"S:{name}"
    if index == last_index:
        return f"F:{name}"
    return f"{index - 1}:{name}"


class TaskTranslator:
    """Translate a :class:`~condor2nav.condor.models.SourceTask` for XCSoar.

    Args:
        converter: Condor landscape → geographic coordinate converter
            (see :class:`~condor2nav.condor.coords.CoordConverter`).
    """

    def __init__(self, converter) -> None:
        self._converter = converter
        self._normalizer = SectorNormalizer()
        self._aat = AatCorridorBuilder()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def translate(self, task: SourceTask, options: TranslateOptions | None = None) -> TaskTranslation:
        """Translate *task*.

        Raises:
            CapacityExceeded: If the task has more turnpoints (launch
                excluded) than ``options.max_task_points``.
            UnsupportedSectorShape: If a turnpoint uses an unknown sector code.
        """
        options = options or TranslateOptions()
        count = len(task.turnpoints)
        if count - 1 > options.max_task_points:
            raise CapacityExceeded(count - 1, options.max_task_points)

        aat_minutes = self._aat_minutes(task, options)
        settings = TaskSettings(
            aat_enabled=aat_minutes > 0,
            aat_minutes=aat_minutes,
            auto_advance=parse_auto_advance(options.auto_advance),
        )
        task_points = [TaskPoint() for _ in range(options.max_task_points)]
        start_points = [StartPoint() for _ in range(options.max_start_points)]
        waypoints: list[Waypoint] = []
        wp_lines: list[str] = []

        positions = [
            GeoPoint.from_landscape(self._converter, tp.x, tp.y) for tp in task.turnpoints
        ]
        last = count - 1
        state = SectorState(settings=settings)

        for i in range(1, count):
            tp = task.turnpoints[i]
            name = display_name(tp.name, i, last)
            position = positions[i]
            altitude = tp.width if tp.width else tp.z

            if options.generate_waypoint_file:
                wp_lines.append(waypoint_line(i, position, altitude, name, tp.name))

            waypoint = Waypoint(
                number=WAYPOINT_INDEX_OFFSET + i,
                position=position,
                altitude=altitude,
                flags=WaypointFlag.TURNPOINT,
                name=name,
                comment=tp.name,
            )
            waypoints.append(waypoint)
            slot = task_points[i - 1]
            slot.index = waypoint.number

            if settings.aat_enabled and 1 < i < last:
                if tp.sector_type == SectorShape.CLASSIC:
                    self._aat.build(
                        slot, tp.angle, tp.radius, positions[i - 1], position, positions[i + 1]
                    )
                    continue
                if tp.sector_type != SectorShape.WINDOW:
                    raise UnsupportedSectorShape(tp.sector_type, name)
            state = self._normalizer.apply(state, tp, name, i, last)

        state = self._normalizer.finish(state)
        _logger.debug(
            "Translated %d turnpoints (aat=%s, tps_valid=%s, %d issues)",
            max(count - 1, 0),
            settings.aat_enabled,
            state.tps_valid,
            len(state.issues),
        )
        return TaskTranslation(
            settings=replace(state.settings),
            task_points=task_points,
            start_points=start_points,
            waypoints=waypoints,
            waypoint_lines=wp_lines,
            issues=list(state.issues),
            tps_valid=state.tps_valid,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _aat_minutes(self, task: SourceTask, options: TranslateOptions) -> int:
        if options.aat_minutes is not None:
            return max(options.aat_minutes, 0)
        if task.aat_enabled:
            return int(task.aat_hours * 60 + 0.5)
        return 0
