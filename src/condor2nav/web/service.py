"""TranslationService — the full Condor → XCSoar pipeline used by the API and CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from condor2nav.condor.models import SourceTask
from condor2nav.condor.parser import CondorTaskParser
from condor2nav.task.models import AirspaceRecord, TaskTranslation, TranslateOptions
from condor2nav.task.penalty import (
    AIRSPACES_FILE_NAME,
    PenaltyZoneTranslator,
    airspace_file_reference,
)
from condor2nav.task.translator import TaskTranslator
from condor2nav.xcsoar.formatter import airspace_lines
from condor2nav.xcsoar.profile import OUTPUT_PROFILE_NAME, ProfileStore, scenery_time_values
from condor2nav.xcsoar.writer import WP_FILE_NAME

_logger = logging.getLogger(__name__)


@dataclass
class TranslationOutput:
    """Result of one pipeline run, ready to be committed to disk."""

    translation: TaskTranslation
    airspaces: list[AirspaceRecord]
    profile: ProfileStore
    airspace_file: list[str]

    @property
    def warnings(self) -> list[str]:
        return self.translation.warnings

    def files(self) -> dict[str, list[str]]:
        """Return ``file name → lines`` for every file XCSoar should receive."""
        files = {OUTPUT_PROFILE_NAME: self.profile.lines()}
        if self.translation.waypoint_lines:
            files[WP_FILE_NAME] = list(self.translation.waypoint_lines)
        if self.airspaces:
            files[AIRSPACES_FILE_NAME] = list(self.airspace_file)
        return files


class TranslationService:
    """Runs parse → task translation → penalty zones → profile update.

    Parameters
    ----------
    converter:
        Condor landscape → geographic coordinate converter.
    parser:
        Optional flight-plan parser for testing injection.
    """

    def __init__(self, converter, parser: CondorTaskParser | None = None) -> None:
        self._converter = converter
        self._parser = parser or CondorTaskParser()

    def run_text(
        self,
        task_text: str,
        options: TranslateOptions,
        profile: ProfileStore | None = None,
    ) -> TranslationOutput:
        """Parse flight-plan text and run :meth:`run` on it."""
        return self.run(self._parser.parse(task_text), options, profile)

    def run(
        self,
        task: SourceTask,
        options: TranslateOptions,
        profile: ProfileStore | None = None,
    ) -> TranslationOutput:
        """Translate *task* and apply the results to a copy of *profile*.

        Raises
        ------
        TranslationError
            If the task cannot be represented (too many turnpoints, unknown
            sector shape). Nothing is produced in that case.
        """
        profile = ProfileStore(profile.lines()) if profile is not None else ProfileStore()
        if options.auto_advance is None:
            options = replace(options, auto_advance=profile.get("AutoAdvance"))

        translation = TaskTranslator(self._converter).translate(task, options)
        airspaces = PenaltyZoneTranslator(self._converter).translate(task.penalty_zones)

        profile.update(scenery_time_values())
        profile.update(translation.profile_values())
        profile.set("AirspaceFile", airspace_file_reference(task.penalty_zones, options.path_prefix))

        for message in translation.warnings:
            _logger.warning("%s", message)
        _logger.info(
            "Task translated: %d waypoints, %d penalty zones, %d warnings",
            len(translation.waypoints),
            len(airspaces),
            len(translation.warnings),
        )

        return TranslationOutput(
            translation=translation,
            airspaces=airspaces,
            profile=profile,
            airspace_file=airspace_lines(airspaces) if airspaces else [],
        )
