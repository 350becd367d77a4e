"""Tests for TranslationService."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from condor2nav.condor.models import SourceTask, SourceTurnpoint
from condor2nav.task.errors import CapacityExceeded
from condor2nav.task.models import TranslateOptions
from condor2nav.web.service import TranslationService
from condor2nav.xcsoar.profile import ProfileStore

_ZONE = {"top": 2500, "base": 0, "corners": [(14.0, 46.0), (14.1, 46.0), (14.1, 46.1), (14.0, 46.1)]}


@pytest.fixture
def svc(converter):
    return TranslationService(converter)


def test_run_text_updates_fresh_profile(svc, simple_fpl):
    output = svc.run_text(simple_fpl, TranslateOptions())
    values = output.profile.as_dict()
    assert values["UTCOffset"] == "0"
    assert values["StartLine"] == "2"
    assert values["FinishLine"] == "1"
    assert values["AutoAdvance"] == "3"
    assert values["AirspaceFile"] == '""'
    assert output.warnings == []


def test_existing_profile_is_copied_and_merged(svc, simple_fpl):
    original = ProfileStore(["# mine", "PilotName=Jane", "Radius=9999", "AutoAdvance=1"])
    output = svc.run_text(simple_fpl, TranslateOptions(), original)
    assert output.profile.get("PilotName") == "Jane"
    assert output.profile.get("Radius") == "500"
    assert output.profile.lines()[0] == "# mine"
    assert original.get("Radius") == "9999"


def test_auto_advance_read_from_profile(svc, simple_fpl):
    output = svc.run_text(simple_fpl, TranslateOptions(), ProfileStore(["AutoAdvance=1"]))
    assert output.profile.get("AutoAdvance") == "1"


def test_explicit_auto_advance_wins(svc, simple_fpl):
    output = svc.run_text(simple_fpl, TranslateOptions(auto_advance="0"), ProfileStore(["AutoAdvance=1"]))
    assert output.profile.get("AutoAdvance") == "0"


def test_files_without_zones(svc, simple_fpl):
    files = svc.run_text(simple_fpl, TranslateOptions()).files()
    assert sorted(files) == ["Condor.dat", "Condor.prf"]
    assert len(files["Condor.dat"]) == 3


def test_files_with_zones_and_no_waypoint_file(svc, fpl_factory):
    text = fpl_factory(
        [{"name": "L", "x": 14.0, "y": 46.0}, {"name": "S", "x": 14.1, "y": 46.0}, {"name": "F", "x": 14.2, "y": 46.0}],
        zones=[_ZONE],
    )
    output = svc.run_text(text, TranslateOptions(generate_waypoint_file=False, path_prefix="Condor"))
    files = output.files()
    assert sorted(files) == ["Condor.prf", "Condor.txt"]
    assert files["Condor.txt"][4] == "AC P"
    assert output.profile.get("AirspaceFile") == '"Condor\\Condor.txt"'


def test_translation_error_propagates(svc, simple_fpl):
    with pytest.raises(CapacityExceeded):
        svc.run_text(simple_fpl, TranslateOptions(max_task_points=2))


def test_warnings_are_logged(svc, caplog):
    task = SourceTask(turnpoints=[
        SourceTurnpoint("L", 0.0, 0.0, 0.0, 0, 500.0, 90),
        SourceTurnpoint("S", 0.1, 0.0, 0.0, 0, 500.0, 270),
        SourceTurnpoint("F", 0.2, 0.0, 0.0, 0, 500.0, 360),
    ])
    with caplog.at_level(logging.INFO, logger="condor2nav.web.service"):
        output = svc.run(task, TranslateOptions())
    assert len(output.warnings) == 1
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert [r.getMessage() for r in warnings] == output.warnings
    assert "1 warnings" in caplog.text


def test_injected_parser_is_used(converter):
    parser = MagicMock()
    parser.parse.return_value = SourceTask(turnpoints=[])
    output = TranslationService(converter, parser=parser).run_text("anything", TranslateOptions())
    parser.parse.assert_called_once_with("anything")
    assert output.translation.waypoints == []
