"""Great-circle bearing between two geographic points."""

from __future__ import annotations

import math

from condor2nav.task.models import GeoPoint


def waypoint_bearing(origin: GeoPoint, target: GeoPoint) -> int:
    """Initial great-circle bearing from *origin* to *target*.

    Returns:
        Whole degrees from true north in ``[0, 360)``, rounded to the nearest
        degree. Coincident points give 0.
    """
    lon1 = math.radians(origin.longitude)
    lat1 = math.radians(origin.latitude)
    lon2 = math.radians(target.longitude)
    lat2 = math.radians(target.latitude)

    clat1 = math.cos(lat1)
    clat2 = math.cos(lat2)
    dlon = lon2 - lon1

    y = math.sin(dlon) * clat2
    x = clat1 * math.sin(lat2) - math.sin(lat1) * clat2 * math.cos(dlon)
    if x == 0 and y == 0:
        return 0
    return int(360 + math.degrees(math.atan2(y, x)) + 0.5) % 360
