"""AAT corridor construction for intermediate assigned-area turnpoints."""

from __future__ import annotations

from condor2nav.task.bearing import waypoint_bearing
from condor2nav.task.models import GeoPoint, TaskPoint, TaskPointSector


def bisector(angle1: int, angle2: int) -> int:
    """Return the bisector of two bearings, picking the side away from their direct arc.

    The two candidate bisectors are 180° apart; when the bearings are more
    than 180° apart the arithmetic mean points the wrong way and is flipped.
    """
    if angle1 == angle2:
        return angle1
    half = int((angle1 + angle2) / 2.0 + 0.5)
    if abs(angle1 - angle2) > 180:
        half = (half + 180) % 360
    return half


class AatCorridorBuilder:
    """Compute the XCSoar AAT geometry of one intermediate turnpoint.

    A 360° Condor sector becomes an AAT circle. Any other angle becomes an AAT
    sector of that angle, centred on the bisector of the bearings from the
    previous and the next turnpoint towards this one.
    """

    def build(
        self,
        slot: TaskPoint,
        angle: int,
        radius: float,
        previous: GeoPoint,
        current: GeoPoint,
        following: GeoPoint,
    ) -> TaskPoint:
        """Fill *slot* with the AAT sector geometry and return it.

        Args:
            slot: The task slot of the current turnpoint (already linked).
            angle: Condor sector angle in degrees.
            radius: Condor sector radius in metres.
            previous: Position of the preceding turnpoint.
            current: Position of this turnpoint.
            following: Position of the next turnpoint.
        """
        slot.sector_radius = radius
        if angle == 360:
            slot.sector_type = TaskPointSector.AAT_CIRCLE
            slot.aat_start_radial = 0
            slot.aat_finish_radial = 360
            return slot

        slot.sector_type = TaskPointSector.AAT_SECTOR
        angle1 = waypoint_bearing(previous, current)
        angle2 = waypoint_bearing(following, current)
        half = bisector(angle1, angle2)
        slot.aat_start_radial = int(360 + half - angle / 2.0) % 360
        slot.aat_finish_radial = int(360 + half + angle / 2.0) % 360
        return slot
