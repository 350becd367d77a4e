"""Condor landscape coordinates → geographic coordinates.

Condor ships the exact conversion as a native Windows library; the
translator only depends on the :class:`CoordConverter` protocol so that
library (or any other implementation) can be injected.
:class:`FlatEarthConverter` is a local tangent-plane approximation anchored
at a known geographic origin, accurate to a few metres over a landscape of
a few hundred kilometres.
"""

from __future__ import annotations

import math
from typing import Protocol

EARTH_RADIUS_M = 6_371_000.0


class CoordConverter(Protocol):
    """Converts Condor landscape ``(x, y)`` metres to degrees."""

    def latitude(self, x: float, y: float) -> float: ...

    def longitude(self, x: float, y: float) -> float: ...


class FlatEarthConverter:
    """Tangent-plane converter with x pointing east and y pointing north.

    Args:
        origin_lat: Latitude of landscape point ``(0, 0)`` in degrees.
        origin_lon: Longitude of landscape point ``(0, 0)`` in degrees.
    """

    def __init__(self, origin_lat: float, origin_lon: float) -> None:
        if not -90.0 < origin_lat < 90.0:
            raise ValueError("origin_lat must be within (-90, 90)")
        self.origin_lat = origin_lat
        self.origin_lon = origin_lon
        self._m_per_deg_lat = EARTH_RADIUS_M * math.pi / 180.0
        self._m_per_deg_lon = self._m_per_deg_lat * math.cos(math.radians(origin_lat))

    def latitude(self, x: float, y: float) -> float:
        return self.origin_lat + y / self._m_per_deg_lat

    def longitude(self, x: float, y: float) -> float:
        lon = self.origin_lon + x / self._m_per_deg_lon
        return (lon + 180.0) % 360.0 - 180.0
