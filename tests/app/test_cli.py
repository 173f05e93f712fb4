import json

from click.testing import CliRunner

from flight_planner.app.cli import main

import pytest


@pytest.fixture
def plan_file(tmp_path):
    plan = {
        "waypoints": [
            {"name": "A", "location": [0.0, 0.0], "elevation": 100},
            {"name": "B", "location": [1.0, 0.0], "wind": {"speed": 0, "direction": 0}},
            {
                "name": "C",
                "icao": "EDCC",
                "location": [1.0, 1.0],
                "elevation": 200,
                "wind": {"speed": 0, "direction": 0},
            },
        ],
        "aircraft": {"cruise_speed": 120, "fuel_consumption": 24},
    }
    path = tmp_path / "plan.json"
    path.write_text(json.dumps(plan))
    return path


def test_cli_prints_nav_log(plan_file):
    runner = CliRunner()
    result = runner.invoke(
        main, [str(plan_file), "--departure", "2024-06-01T09:00:00+00:00"]
    )
    assert result.exit_code == 0, result.output
    assert "EDCC" in result.output
    assert "Total distance: 120 nm" in result.output
    assert "Total duration: 60 min" in result.output
    assert "Total fuel required: 36 l" in result.output
    assert "Arrival: 2024-06-01T10:00+00:00" in result.output


def test_cli_options_override_plan(plan_file, tmp_path):
    output = tmp_path / "navlog.json"
    runner = CliRunner()
    result = runner.invoke(
        main,
        [
            str(plan_file),
            "--altitude",
            "4500",
            "--reserve-duration",
            "45",
            "--output",
            str(output),
        ],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text())
    assert data["fuel_breakdown"]["reserve"] == 18
    assert data["route"][0]["end"]["altitude"] == 4500
    assert data["route"][0]["start"]["altitude"] == 100


def test_cli_rejects_single_waypoint(tmp_path):
    path = tmp_path / "plan.json"
    path.write_text(json.dumps({"waypoints": [{"name": "A", "lon": 0, "lat": 0}]}))
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code != 0
    assert "Provided: 1 waypoint(s)" in result.output


def test_cli_rejects_invalid_plan(tmp_path):
    path = tmp_path / "plan.json"
    path.write_text("[")
    result = CliRunner().invoke(main, [str(path)])
    assert result.exit_code != 0
    assert "not valid JSON" in result.output


def test_cli_rejects_invalid_departure(plan_file):
    result = CliRunner().invoke(main, [str(plan_file), "--departure", "tomorrow"])
    assert result.exit_code == 2
