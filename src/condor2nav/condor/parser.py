"""CondorTaskParser — reads a Condor flight plan (``.fpl``) into a SourceTask."""

from __future__ import annotations

import configparser
from pathlib import Path

from condor2nav.condor.models import SourcePenaltyZone, SourceTask, SourceTurnpoint
from condor2nav.task.errors import TranslationError

_TASK = "Task"
_GAME_OPTIONS = "GameOptions"
_PZ_CORNERS = 4


class TaskFormatError(TranslationError):
    """Raised when a flight plan is missing a key or holds a non-numeric value."""


class CondorTaskParser:
    """Parses the INI-style Condor flight-plan text.

    Keys are case-sensitive (``TPPosX1`` not ``tpposx1``). Only the ``[Task]``
    and ``[GameOptions]`` sections are read; weather, plane and description
    sections are ignored.
    """

    def parse(self, text: str) -> SourceTask:
        """Convert flight-plan *text* into a :class:`SourceTask`.

        Raises:
            TaskFormatError: If the ``[Task]`` section or a required key is
                missing, or a numeric key cannot be converted.
        """
        ini = configparser.ConfigParser(interpolation=None, strict=False)
        ini.optionxform = str  # keep Condor's key case
        try:
            ini.read_string(text)
        except configparser.Error as exc:
            raise TaskFormatError(f"Invalid flight plan: {exc}") from exc
        if not ini.has_section(_TASK):
            raise TaskFormatError(f"Flight plan has no [{_TASK}] section")

        task = ini[_TASK]
        count = _int(task, "Count")
        turnpoints = [self._turnpoint(task, i) for i in range(count)]

        pz_count = _int(task, "PZCount", default=0)
        zones = [self._penalty_zone(task, i) for i in range(pz_count)]

        aat_enabled = False
        aat_hours = 0.0
        if ini.has_section(_GAME_OPTIONS):
            options = ini[_GAME_OPTIONS]
            aat_enabled = _int(options, "AAT", default=0) != 0
            aat_hours = _float(options, "AATTime", default=0.0)

        return SourceTask(
            turnpoints=turnpoints,
            penalty_zones=zones,
            aat_enabled=aat_enabled,
            aat_hours=aat_hours,
        )

    def parse_file(self, path: str | Path) -> SourceTask:
        """Read and parse the flight plan at *path*.

        Condor writes files in the Windows ANSI code page; text that is not
        valid UTF-8 is decoded as latin-1.
        """
        raw = Path(path).read_bytes()
        try:
            text = raw.decode("utf-8-sig")
        except UnicodeDecodeError:
            text = raw.decode("latin-1")
        return self.parse(text)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _turnpoint(self, task: configparser.SectionProxy, i: int) -> SourceTurnpoint:
        return SourceTurnpoint(
            name=_str(task, f"TPName{i}"),
            x=_float(task, f"TPPosX{i}"),
            y=_float(task, f"TPPosY{i}"),
            z=_float(task, f"TPPosZ{i}", default=0.0),
            sector_type=_int(task, f"TPSectorType{i}", default=0),
            radius=_float(task, f"TPRadius{i}", default=0.0),
            angle=_int(task, f"TPAngle{i}", default=0),
            width=_float(task, f"TPWidth{i}", default=0.0),
            height=_float(task, f"TPHeight{i}", default=0.0),
        )

    def _penalty_zone(self, task: configparser.SectionProxy, i: int) -> SourcePenaltyZone:
        corners = tuple(
            (_float(task, f"PZPos{j}X{i}"), _float(task, f"PZPos{j}Y{i}"))
            for j in range(_PZ_CORNERS)
        )
        return SourcePenaltyZone(
            top=_float(task, f"PZTop{i}"),
            base=_float(task, f"PZBase{i}", default=0.0),
            corners=corners,
        )


_MISSING = object()


def _str(section: configparser.SectionProxy, key: str, default=_MISSING) -> str:
    value = section.get(key)
    if value is None:
        if default is _MISSING:
            raise TaskFormatError(f"Missing key {key!r} in [{section.name}]")
        return default
    return value.strip()


def _float(section: configparser.SectionProxy, key: str, default=_MISSING) -> float:
    value = _str(section, key, default)
    if isinstance(value, float):
        return value
    try:
        return float(value.replace(",", "."))
    except ValueError as exc:
        raise TaskFormatError(f"Invalid value {value!r} for key {key!r}") from exc


def _int(section: configparser.SectionProxy, key: str, default=_MISSING) -> int:
    value = _str(section, key, default)
    if isinstance(value, int):
        return value
    try:
        return int(float(value))
    except (ValueError, OverflowError) as exc:
        raise TaskFormatError(f"Invalid value {value!r} for key {key!r}") from exc
