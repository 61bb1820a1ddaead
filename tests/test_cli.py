"""
Tests for the command-line interface.
"""

import json

import pytest

from helixcalc.cli.main import cli, create_parser
from helixcalc.cli.readable_output import format_bearing_report, format_reducer_report
from helixcalc.models.inputs import example_input


@pytest.fixture
def reducer_file(tmp_path):
    """Write an example reducer input file."""
    path = tmp_path / "reducer_input.json"
    path.write_text(example_input("reducer").model_dump_json(exclude_none=True))
    return path


class TestParser:
    """Tests for argument parsing."""

    def test_calculation_commands_require_input(self):
        """Test --input is required for calculations."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["reducer"])

    def test_export_defaults(self):
        """Test export output directory and repeatable bearings."""
        args = create_parser().parse_args(
            ["export", "-i", "r.json", "--bearing", "a.json", "--bearing", "b.json"]
        )

        assert str(args.output_dir) == "data"
        assert [str(p) for p in args.bearing] == ["a.json", "b.json"]

    def test_no_command_prints_help(self, capsys):
        """Test running without a command shows help."""
        assert cli([]) == 0
        assert "usage" in capsys.readouterr().out


class TestCalculationCommands:
    """Tests for reducer, stage, bearing and shaft commands."""

    def test_make_example_kinds(self, tmp_path):
        """Test every example kind is written as valid JSON."""
        for kind in ("reducer", "stage", "bearing", "shaft"):
            path = tmp_path / f"{kind}.json"
            assert cli(["make-example", "--kind", kind, "--output", str(path)]) == 0
            assert isinstance(json.loads(path.read_text()), dict)

    def test_reducer_to_stdout(self, reducer_file, capsys):
        """Test reducer JSON goes to stdout."""
        assert cli(["reducer", "--input", str(reducer_file)]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "RD-11kW"
        assert "stage1" in data

    def test_reducer_to_file(self, reducer_file, tmp_path):
        """Test --output saves the result."""
        output = tmp_path / "result.json"
        assert cli(["reducer", "--input", str(reducer_file), "--output", str(output)]) == 0

        data = json.loads(output.read_text())
        assert data["tooth_counts"]["z1"] == 20

    def test_reducer_report(self, reducer_file, capsys):
        """Test --report prints the readable report."""
        assert cli(["reducer", "--input", str(reducer_file), "--report"]) == 0
        assert "Stage 1" in capsys.readouterr().out

    def test_bearing_command(self, tmp_path, capsys):
        """Test explicit bearing selection from a file."""
        path = tmp_path / "bearing.json"
        path.write_text(json.dumps({"radial_load_n": 4800, "speed_rpm": 500, "designation": "6205"}))

        assert cli(["bearing", "--input", str(path)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["bearing"]["designation"] == "6205"

    def test_bearing_custom_catalog(self, tmp_path, capsys):
        """Test --catalog replaces the built-in catalog."""
        catalog = tmp_path / "catalog.json"
        catalog.write_text(json.dumps([{
            "designation": "X25",
            "bore_mm": 25,
            "outer_diameter_mm": 52,
            "width_mm": 15,
            "dynamic_load_n": 50000,
            "static_load_n": 30000,
            "kind": "deep_groove_ball",
        }]))
        path = tmp_path / "bearing.json"
        path.write_text(json.dumps({"radial_load_n": 4800, "speed_rpm": 500, "bore_diameter_mm": 25}))

        assert cli(["bearing", "--input", str(path), "--catalog", str(catalog)]) == 0
        assert json.loads(capsys.readouterr().out)["bearing"]["designation"] == "X25"

    def test_shaft_command(self, tmp_path, capsys):
        """Test shaft sizing from the example file."""
        path = tmp_path / "shaft.json"
        cli(["make-example", "--kind", "shaft", "--output", str(path)])
        capsys.readouterr()

        assert cli(["shaft", "--input", str(path)]) == 0
        assert json.loads(capsys.readouterr().out)["standard_diameter_mm"] > 0

    def test_invalid_json(self, tmp_path, capsys):
        """Test malformed JSON returns 1."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        assert cli(["reducer", "--input", str(path)]) == 1
        assert "Invalid JSON" in capsys.readouterr().err

    def test_validation_error(self, tmp_path, capsys):
        """Test invalid inputs return 1 with a validation message."""
        path = tmp_path / "stage.json"
        path.write_text(json.dumps({"power_kw": -1, "speed_rpm": 1450, "ratio": 3}))

        assert cli(["stage", "--input", str(path)]) == 1
        assert "Validation Error" in capsys.readouterr().err

    def test_unknown_bearing(self, tmp_path, capsys):
        """Test selection errors return 1."""
        path = tmp_path / "bearing.json"
        path.write_text(json.dumps({"radial_load_n": 100, "speed_rpm": 500, "designation": "9999"}))

        assert cli(["bearing", "--input", str(path)]) == 1
        assert "9999" in capsys.readouterr().err


class TestExportAndReport:
    """Tests for export and report commands."""

    def test_export(self, reducer_file, tmp_path):
        """Test .dat files are written to the output directory."""
        out_dir = tmp_path / "out"
        assert cli(["export", "--input", str(reducer_file), "--output-dir", str(out_dir)]) == 0

        assert (out_dir / "Disli1.dat").exists()
        assert (out_dir / "devir.dat").exists()
        assert not (out_dir / "shaft.dat").exists()
        assert not (out_dir / "yerles.dat").exists()

    def test_export_positions(self, reducer_file, tmp_path):
        """Test --positions adds the layout record."""
        positions = tmp_path / "positions.json"
        positions.write_text(json.dumps({"yn1_mm": 40, "yn2_mm": 40, "yn3_mm": 110, "yn4_mm": 110}))
        out_dir = tmp_path / "out"

        assert cli([
            "export", "--input", str(reducer_file), "--positions", str(positions), "--output-dir", str(out_dir)
        ]) == 0
        assert len((out_dir / "yerles.dat").read_text().splitlines()) == 6

    def test_report_from_saved_result(self, reducer_file, tmp_path, capsys):
        """Test a saved result renders again."""
        output = tmp_path / "result.json"
        cli(["reducer", "--input", str(reducer_file), "--output", str(output)])
        capsys.readouterr()

        assert cli(["report", "--input", str(output)]) == 0
        assert "Stage 2" in capsys.readouterr().out

    def test_report_formatters(self):
        """Test formatters tolerate sparse dicts."""
        assert isinstance(format_reducer_report({"stage1": {}, "stage2": {}}), str)
        assert "n/a" in format_bearing_report({"bearing": {}})


class TestCatalogCommands:
    """Tests for materials and bearings listings."""

    def test_materials(self, capsys):
        """Test the gear material listing."""
        assert cli(["materials"]) == 0
        assert "DIN 17 200, Ck 45" in capsys.readouterr().out

    def test_bearings_by_kind(self, capsys):
        """Test the bearing listing filter."""
        assert cli(["bearings", "--kind", "cylindrical_roller"]) == 0

        out = capsys.readouterr().out
        assert "NU 205" in out
        assert "6205" not in out

    def test_bearings_saved_as_catalog(self, tmp_path, capsys):
        """Test --output writes a filtered catalog that --catalog reads back."""
        path = tmp_path / "rollers.json"
        assert cli(["bearings", "--kind", "cylindrical_roller", "--output", str(path)]) == 0

        rows = json.loads(path.read_text())
        assert len(rows) > 0
        assert all(r["kind"] == "cylindrical_roller" for r in rows)
        capsys.readouterr()

        assert cli(["bearings", "--catalog", str(path)]) == 0
        assert "NU 205" in capsys.readouterr().out
