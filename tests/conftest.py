"""Shared fixtures: flight-plan text factory and a degree-valued coordinate converter."""

from __future__ import annotations

import pytest


class _DegreeConverter:
    """Treats landscape x as longitude and y as latitude, both in degrees."""

    def latitude(self, x: float, y: float) -> float:
        return y

    def longitude(self, x: float, y: float) -> float:
        return x


@pytest.fixture
def converter() -> _DegreeConverter:
    return _DegreeConverter()


def make_fpl(
    turnpoints: list[dict],
    zones: list[dict] | None = None,
    aat: bool = False,
    aat_hours: float = 0.0,
) -> str:
    """Build Condor flight-plan text.

    Each turnpoint dict needs ``name``, ``x``, ``y``; the other keys default
    to a classic 90° sector of 500 m.
    """
    lines = ["[Version]", "Condor version=2200", "", "[Task]", "Landscape=Slovenia3"]
    lines.append(f"Count={len(turnpoints)}")
    for i, tp in enumerate(turnpoints):
        lines += [
            f"TPName{i}={tp['name']}",
            f"TPPosX{i}={tp['x']}",
            f"TPPosY{i}={tp['y']}",
            f"TPPosZ{i}={tp.get('z', 300)}",
            f"TPAirport{i}={1 if i == 0 else 0}",
            f"TPSectorType{i}={tp.get('sector_type', 0)}",
            f"TPRadius{i}={tp.get('radius', 500)}",
            f"TPAngle{i}={tp.get('angle', 90)}",
            f"TPAltitude{i}=1500",
            f"TPWidth{i}={tp.get('width', 0)}",
            f"TPHeight{i}={tp.get('height', 10000)}",
            f"TPAzimuth{i}=0",
        ]
    zones = zones or []
    lines.append(f"PZCount={len(zones)}")
    for i, zone in enumerate(zones):
        lines += [f"PZTop{i}={zone['top']}", f"PZBase{i}={zone.get('base', 0)}"]
        for j, (x, y) in enumerate(zone["corners"]):
            lines += [f"PZPos{j}X{i}={x}", f"PZPos{j}Y{i}={y}"]
    lines += ["", "[GameOptions]", f"AAT={1 if aat else 0}", f"AATTime={aat_hours}", ""]
    return "\n".join(lines)


@pytest.fixture
def fpl_factory():
    return make_fpl


@pytest.fixture
def simple_fpl() -> str:
    """Launch + start(90) + one FAI turnpoint (500 m) + finish line."""
    return make_fpl([
        {"name": "Lesce", "x": 14.17, "y": 46.36},
        {"name": "Start", "x": 14.20, "y": 46.30, "angle": 90, "radius": 3000, "height": 1500},
        {"name": "Bled", "x": 14.10, "y": 46.37, "angle": 90, "radius": 500},
        {"name": "Finish", "x": 14.18, "y": 46.35, "angle": 180, "radius": 1000},
    ])
