"""Tests for the command-line entry point."""

import argparse
import json
import sys

import pytest

from lad_registry import cli
from lad_registry.contracts.edits import CoordinateEdit, PlaceTypeEdit, TrajectoryCountEdit
from lad_registry.contracts.enums import PlaceType, PointId
from tests.services.fakes import RecordingResolver


@pytest.fixture
def offline(monkeypatch):
    """Replace the HTTP elevation resolver with a fixed answer."""
    monkeypatch.setattr(cli, "ElevationResolver", lambda client, settings: RecordingResolver(meters=12))


class TestParseDMS:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("34:36:30", ("34", "36", "30")),
            ("34°36'30\"", ("34", "36", "30")),
            ("34 36 30.5", ("34", "36", "30.5")),
            ("34", ("34", "", "")),
            ("34:36", ("34", "36", "")),
        ],
    )
    def test_parse(self, text, expected):
        assert cli.parse_dms(text) == expected

    def test_too_many_parts(self):
        with pytest.raises(argparse.ArgumentTypeError):
            cli.parse_dms("1:2:3:4")


class TestBuildEdits:
    def test_runway(self):
        args = argparse.Namespace(
            command="runway", place_type="LADA", t1=["34:36:30", "58:22:54"], t2=["34:36:42", "58:23:10"]
        )
        edits = cli.build_edits(args)
        assert edits[0] == PlaceTypeEdit(place_type=PlaceType.LADA)
        assert len(edits) == 13
        assert all(isinstance(e, CoordinateEdit) for e in edits[1:])
        assert {e.point for e in edits[1:]} == {PointId.UMBRAL1, PointId.UMBRAL2}

    def test_helipad(self):
        args = argparse.Namespace(
            command="helipad",
            center=["34:36:36", "58:22:48"],
            traj=[["34:36:0", "58:22:48"], ["34:37:0", "58:22:48"]],
        )
        edits = cli.build_edits(args)
        assert edits[:2] == [PlaceTypeEdit(place_type=PlaceType.LADH), TrajectoryCountEdit(count=2)]
        assert {e.point for e in edits[2:]} == {PointId.CENTER, PointId.TRAJ1, PointId.TRAJ2}


class TestRun:
    async def test_runway_snapshot(self, offline):
        edits = cli.build_edits(
            argparse.Namespace(
                command="runway", place_type="LAD", t1=["34:36:30", "58:22:54"], t2=["34:36:42", "58:23:10"]
            )
        )
        snapshot = await cli.run(edits)
        assert snapshot["phase"] == "idle"
        assert 545 <= snapshot["runway_length_m"] <= 555
        assert snapshot["designation"]["designator"] in ("24/06", "23/05")
        assert snapshot["points"][0]["point"]["elevation"] == "12.0"

    def test_main_prints_json(self, offline, monkeypatch, capsys):
        monkeypatch.setattr(
            sys, "argv",
            ["lad-registry", "helipad", "--center", "34:36:36", "58:22:48", "--traj", "34:36:0", "58:22:48"],
        )
        cli.main()
        data = json.loads(capsys.readouterr().out)
        assert data["place_type"] == "LADH"
        assert [t["point"] for t in data["designation"]["trajectories"]] == ["traj1"]

    def test_too_many_trajectories(self, monkeypatch):
        monkeypatch.setattr(
            sys, "argv",
            ["lad-registry", "helipad", "--center", "1", "1",
             "--traj", "1", "2", "--traj", "1", "3", "--traj", "1", "4"],
        )
        with pytest.raises(SystemExit):
            cli.main()
