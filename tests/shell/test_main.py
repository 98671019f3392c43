"""Tests for the command-line entry point.

Runs main() end to end against the saved sheet fixture.
"""

import json
import os
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from workout_finder.core.feed import parse_sheet_values
from workout_finder.main import build_listing, format_workout, main
from workout_finder.core.workout import Workout
from workout_finder.shell.feed_reader import read_sheet_values


FIXTURE = Path(__file__).parent.parent / "fixtures" / "sheet_values.json"

# Thursday 10:30 AM
NOW = "2024-02-01T10:30:00"


@pytest.fixture
def config_path(tmp_path):
    """Config file that points at nothing, so tests pass --feed."""
    path = tmp_path / "config.yaml"
    path.write_text("log_level: INFO\n")
    return str(path)


@pytest.fixture
def workouts():
    """Workouts parsed from the fixture."""
    return parse_sheet_values(read_sheet_values(FIXTURE))


class TestFormatWorkout:
    """Tests for format_workout()."""

    def test_summarizes_workout(self):
        """Day is normalized and the address shortened."""
        workout = Workout(
            id="1",
            name="The Keep",
            day_of_week="thu",
            time_range="5:00 AM - 5:45 AM",
            location="26721 Hawks Prairie Blvd, Katy, TX, 77494, United States",
            workout_type="Bootcamp",
            latitude="29.738579",
            longitude="-95.827298",
        )

        result = format_workout(workout)

        assert result["day"] == "Thursday"
        assert result["city"] == "Katy, TX"
        assert result["time"] == "5:00 AM - 5:45 AM"

    def test_keeps_unknown_day_text(self):
        """Unrecognized days are shown as given."""
        result = format_workout(Workout(id="1", day_of_week="Blursday"))

        assert result["day"] == "Blursday"


class TestBuildListing:
    """Tests for build_listing()."""

    def test_orders_region_workouts(self, workouts):
        """Region workouts are ordered from the reference time."""
        result = build_listing(workouts, "menifee", datetime.fromisoformat(NOW))

        assert result["region"] == "Menifee"
        assert [w["name"] for w in result["workouts"]] == ["The Grind", "The Arena"]
        assert result["viewport"]["zoom"] == 12
        assert [m["title"] for m in result["viewport"]["markers"]] == ["The Grind", "The Arena"]

    def test_applies_filters(self, workouts):
        """Day and type filters narrow the listing."""
        result = build_listing(
            workouts,
            "menifee",
            datetime.fromisoformat(NOW),
            day="tue",
            workout_type="bootcamp",
        )

        assert [w["name"] for w in result["workouts"]] == ["The Arena"]

    def test_empty_after_filters(self, workouts):
        """No matches gives the default viewport."""
        result = build_listing(workouts, "ftx", datetime.fromisoformat(NOW), day="Monday")

        assert result["workouts"] == []
        assert result["viewport"]["markers"] == []
        assert result["viewport"]["zoom"] == 4


class TestMain:
    """Tests for main()."""

    def test_lists_regions(self, config_path, capsys):
        """--list-regions prints one slug per line."""
        exit_code = main(["--config", config_path, "--feed", str(FIXTURE), "--list-regions"])

        assert exit_code == 0
        assert capsys.readouterr().out.split() == ["ftx", "menifee", "yorkshire"]

    def test_prints_listing(self, config_path, capsys):
        """A region listing is printed as JSON."""
        exit_code = main([
            "--config", config_path,
            "--feed", str(FIXTURE),
            "--region", "ftx",
            "--now", NOW,
        ])

        assert exit_code == 0
        listing = json.loads(capsys.readouterr().out)
        assert listing["region"] == "FTX"
        assert listing["workouts"][0]["name"] == "The Keep"
        assert listing["viewport"]["center"] == {"lat": 29.738579, "lng": -95.827298}
        assert listing["viewport"]["zoom"] == 13

    def test_region_from_config(self, tmp_path, capsys):
        """Region falls back to the config file."""
        path = tmp_path / "config.yaml"
        path.write_text(f"feed_path: {FIXTURE}\nregion: yorkshire\n")

        exit_code = main(["--config", str(path), "--now", NOW])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["region"] == "Yorkshire"

    def test_unknown_region(self, config_path):
        """An unknown region is an error."""
        exit_code = main(["--config", config_path, "--feed", str(FIXTURE), "--region", "atlantis"])

        assert exit_code == 1

    def test_missing_region(self, config_path):
        """No region anywhere is an error."""
        exit_code = main(["--config", config_path, "--feed", str(FIXTURE)])

        assert exit_code == 1

    def test_missing_feed_file(self, config_path, tmp_path):
        """An unreadable feed is an error."""
        exit_code = main([
            "--config", config_path,
            "--feed", str(tmp_path / "nope.json"),
            "--region", "ftx",
        ])

        assert exit_code == 1

    def test_no_feed_configured(self, config_path):
        """No feed anywhere is an error."""
        assert main(["--config", config_path, "--region", "ftx"]) == 1

    def test_invalid_config(self, tmp_path):
        """Invalid viewport settings stop the run."""
        path = tmp_path / "config.yaml"
        path.write_text("viewport:\n  min_zoom: 12\n  max_zoom: 6\n")

        exit_code = main(["--config", str(path), "--feed", str(FIXTURE), "--region", "ftx"])

        assert exit_code == 1

    def test_undecodable_feed_file(self, config_path, tmp_path):
        """A feed that is not UTF-8 is an error."""
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff")

        assert main(["--config", config_path, "--feed", str(path), "--list-regions"]) == 1

    def test_feed_path_is_directory(self, config_path, tmp_path):
        """A directory given as the feed is an error."""
        assert main(["--config", config_path, "--feed", str(tmp_path), "--list-regions"]) == 1

    def test_unresolved_feed_placeholder(self, tmp_path, caplog):
        """An unset ${VAR} feed path is reported as no feed."""
        path = tmp_path / "config.yaml"
        path.write_text("feed_path: ${WORKOUT_FEED_UNSET}\nregion: ftx\n")

        with patch.dict(os.environ, {}, clear=True):
            exit_code = main(["--config", str(path)])

        assert exit_code == 1
        assert "No feed given" in caplog.text
