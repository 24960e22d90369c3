# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""CLI tests: subcommand dispatch, exports and error handling in cli.py."""
import csv
import json
import logging

import pytest

from neoviz.cli import main, run_impact, run_orbits


@pytest.fixture
def feed_path(tmp_path):
    record = {
        "id": "3542519",
        "neo_reference_id": "3542519",
        "name": "(2010 PK9)",
        "is_potentially_hazardous_asteroid": True,
        "close_approach_data": [{
            "miss_distance": {"kilometers": "2400000.5"},
            "relative_velocity": {"kilometers_per_second": "21.0"},
        }],
    }
    flat = {
        "id": "2000433",
        "name": "433 Eros",
        "missDistanceKm": 26_000_000.0,
        "relativeVelocityKmS": 5.5,
    }
    path = tmp_path / "feed.json"
    path.write_text(
        json.dumps({"near_earth_objects": {"2024-03-01": [record, flat]}}),
        encoding="utf-8",
    )
    return str(path)


class TestOrbitCommand:
    def test_summary_lines(self, feed_path, capsys):
        main(["orbit", "-i", feed_path])
        out = capsys.readouterr().out
        assert "(2010 PK9)" in out
        assert "433 Eros" in out
        assert "+0m" in out

    def test_exports(self, feed_path, tmp_path, capsys):
        csv_path = str(tmp_path / "orbits.csv")
        report_path = str(tmp_path / "report.json")
        main([
            "orbit", "-i", feed_path, "--segments", "32",
            "--export-csv", csv_path, "-o", report_path,
        ])

        with open(csv_path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))
        assert len(rows) == 1 + 2 * 33

        with open(report_path, encoding='utf-8') as f:
            report = json.load(f)
        assert [e["id"] for e in report["orbits"]] == ["3542519", "2000433"]
        for entry in report["orbits"]:
            assert len(entry["position"]) == 3
            assert entry["progress"] == 0.0

    def test_same_object_on_several_dates_exports_every_orbit(self, tmp_path, capsys):
        def approach(miss_km):
            return {
                "id": "54321",
                "name": "X",
                "is_potentially_hazardous_asteroid": False,
                "close_approach_data": [{
                    "miss_distance": {"kilometers": str(miss_km)},
                    "relative_velocity": {"kilometers_per_second": "10.0"},
                }],
            }

        feed = tmp_path / "week.json"
        feed.write_text(json.dumps({"near_earth_objects": {
            "2024-03-01": [approach(100.0)],
            "2024-03-02": [approach(900_000.0)],
        }}), encoding="utf-8")
        csv_path = str(tmp_path / "orbits.csv")

        main(["orbit", "-i", str(feed), "--segments", "4", "--export-csv", csv_path])

        assert capsys.readouterr().out.count("X: a=") == 2
        with open(csv_path, newline='', encoding='utf-8') as f:
            rows = list(csv.reader(f))[1:]
        assert len(rows) == 2 * 5
        starts = [r for r in rows if r[1] == "0"]
        assert len(starts) == 2
        assert starts[0][2:] != starts[1][2:]

    def test_summary_shows_default_inputs(self, tmp_path, capsys):
        path = tmp_path / "sparse.json"
        path.write_text(json.dumps([{"id": "7"}]), encoding="utf-8")
        main(["orbit", "-i", str(path)])
        out = capsys.readouterr().out
        assert "1.00M km" in out
        assert "15.00 km/s" in out

    def test_null_nested_fields_do_not_crash(self, tmp_path, capsys):
        path = tmp_path / "nulls.json"
        path.write_text(json.dumps([{
            "id": "1",
            "close_approach_data": [{"miss_distance": None}],
            "estimated_diameter": None,
        }]), encoding="utf-8")
        main(["orbit", "-i", str(path)])
        assert "1: a=" in capsys.readouterr().out

    def test_select_by_id(self, feed_path):
        entries = run_orbits(feed_path, object_id="2000433", hours=12.0)
        assert len(entries) == 1
        assert entries[0]["name"] == "433 Eros"
        assert entries[0]["hours_offset"] == 12.0

    def test_hours_clamped_with_warning(self, feed_path, caplog):
        with caplog.at_level(logging.WARNING, logger="neoviz.cli"):
            entries = run_orbits(feed_path, hours=500.0)
        assert all(e["hours_offset"] == 168.0 for e in entries)
        assert any("clamped" in r.getMessage() for r in caplog.records)

    def test_unknown_id_exits(self, feed_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["orbit", "-i", feed_path, "--id", "nope"])
        assert exc_info.value.code == 1
        assert "nope" in capsys.readouterr().err

    def test_missing_input_file(self, tmp_path, capsys):
        missing = str(tmp_path / "nonexistent.json")
        with pytest.raises(SystemExit) as exc_info:
            main(["orbit", "-i", missing])
        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err.lower()


class TestImpactCommand:
    def test_default_parameters(self, capsys):
        main(["impact"])
        out = capsys.readouterr().out
        assert "Megatons TNT" in out
        assert "Chicxulub impactor's baby cousin" in out

    def test_preset(self, capsys):
        main(["impact", "--preset", "chicxulub impactor"])
        out = capsys.readouterr().out
        assert "Gigatons TNT" in out
        assert "dinosaur-killer" in out

    def test_override_keeps_other_preset_fields(self):
        report = run_impact(preset="Tunguska-type", diameter_km=0.1)
        assert report["parameters"] == {
            "diameter_km": 0.1,
            "velocity_km_s": 15.0,
            "density_kg_m3": 2500.0,
            "angle_degs": 30.0,
        }

    def test_named_location(self):
        report = run_impact(location="siberia")
        assert report["location"]["lat_deg"] == 62.0
        assert report["location"]["lng_deg"] == 100.0
        assert len(report["location"]["scene"]) == 3

    def test_seeded_random_location(self):
        a = run_impact(location="Random", seed=3)
        b = run_impact(location="Random", seed=3)
        assert a["location"] == b["location"]
        assert -70.0 <= a["location"]["lat_deg"] < 70.0

    def test_report_file(self, tmp_path):
        path = str(tmp_path / "impact.json")
        main(["impact", "--preset", "City Killer", "-o", path])
        with open(path, encoding='utf-8') as f:
            report = json.load(f)
        assert report["result"]["energy_megatons"] == pytest.approx(253.4, rel=1e-3)

    def test_unknown_preset_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["impact", "--preset", "Death Star"])
        assert exc_info.value.code == 1
        assert "Death Star" in capsys.readouterr().err

    def test_invalid_angle_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["impact", "--angle", "120"])
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_overflowing_diameter_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["impact", "--diameter", "1e103"])
        assert exc_info.value.code == 1
        assert "overflows" in capsys.readouterr().err

    def test_unknown_location_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["impact", "--location", "Atlantis"])
        assert exc_info.value.code == 1


class TestPresetsCommand:
    def test_lists_all_presets(self, capsys):
        main(["presets"])
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 6
        assert lines[0].startswith("Small Meteorite")
        assert lines[-1].startswith("Chicxulub Impactor")


class TestArgumentParsing:
    def test_subcommand_required(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
