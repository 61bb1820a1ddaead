"""
Tests for .dat file export.
"""

import pytest

from helixcalc.catalog.matcher import select_bearing
from helixcalc.export.dat import (
    BEARING_ADEQUATE,
    BEARING_INADEQUATE,
    format_dat_line,
    generate_dat_files,
    write_dat_files,
)
from helixcalc.generator.reducer import size_reducer
from helixcalc.generator.shaft import size_shaft
from helixcalc.models.inputs import BearingInput, DrawingPositions


@pytest.fixture
def reducer_result(reducer_inputs):
    return size_reducer(reducer_inputs)


def _values(record):
    return [float(v) for v in record.split(",")]


class TestDatFormat:
    """Tests for record formatting."""

    def test_two_decimals(self):
        """Test values are comma-joined with two decimals."""
        assert format_dat_line([15, 2.5, 1.005e3]) == "15.00, 2.50, 1005.00\n"

    def test_integers_formatted_as_floats(self):
        """Test tooth counts are written like every other value."""
        assert format_dat_line([20, 63]) == "20.00, 63.00\n"

    def test_text_unchanged(self):
        """Test status text is written as is."""
        assert format_dat_line([1, "OK"]) == "1.00, OK\n"


class TestGenerateDatFiles:
    """Tests for generate_dat_files."""

    def test_reducer_only(self, reducer_result):
        """Test a reducer alone produces stage and speed records."""
        files = generate_dat_files(reducer_result)
        assert set(files) == {"Disli1.dat", "Disli2.dat", "devir.dat"}

    def test_stage_record_positions(self, reducer_result):
        """Test stage records carry 18 values in drawing script order."""
        values = _values(generate_dat_files(reducer_result)["Disli1.dat"])
        stage = reducer_result.stage1
        g = stage.geometry
        f = stage.pinion_forces

        assert len(values) == 18
        assert values[0] == pytest.approx(15.0)
        assert values[1] == values[2] == pytest.approx(g.face_width_mm, abs=0.005)
        assert values[3] == g.module_mm
        assert values[4:6] == [0.0, 0.0]
        assert values[6] == pytest.approx(g.pitch_diameter_pinion_mm, abs=0.005)
        assert values[7] == pytest.approx(g.pitch_diameter_gear_mm, abs=0.005)
        assert values[8] == pytest.approx(g.center_distance_mm, abs=0.005)
        assert values[9] == pytest.approx(g.pitch_diameter_pinion_mm + 2 * g.module_mm, abs=0.01)
        assert values[12] == pytest.approx(g.pitch_diameter_gear_mm - 2.5 * g.module_mm, abs=0.01)
        assert values[13:15] == [20.0, 63.0]
        assert values[15] == pytest.approx(f.tangential_n, abs=0.005)
        assert values[16] == pytest.approx(f.axial_n, abs=0.005)
        assert values[17] == pytest.approx(f.radial_n, abs=0.005)

    def test_second_stage_teeth(self, reducer_result):
        """Test the second stage record carries z3 and z4."""
        values = _values(generate_dat_files(reducer_result)["Disli2.dat"])

        assert len(values) == 18
        assert values[13:15] == [22.0, 70.0]

    def test_speeds_record(self, reducer_result):
        """Test the speed cascade record."""
        values = _values(generate_dat_files(reducer_result)["devir.dat"])

        assert values[0] == 1000.0
        assert values[1] == pytest.approx(reducer_result.speeds.intermediate_rpm, abs=0.005)
        assert values[2] == pytest.approx(reducer_result.speeds.output_actual_rpm, abs=0.005)

    def test_positions_record(self, reducer_result):
        """Test positions are written one per line with default center distances."""
        positions = DrawingPositions(yn1_mm=40, yn2_mm=40, yn3_mm=110, yn4_mm=110, ao2_mm=200)
        lines = generate_dat_files(reducer_result, positions=positions)["yerles.dat"].splitlines()

        assert len(lines) == 6
        assert [float(v) for v in lines[:4]] == [40.0, 40.0, 110.0, 110.0]
        assert float(lines[4]) == pytest.approx(reducer_result.stage1.geometry.center_distance_mm, abs=0.005)
        assert float(lines[5]) == 200.0

    def test_no_positions_record_by_default(self, reducer_result):
        """Test yerles.dat is only written with positions."""
        assert "yerles.dat" not in generate_dat_files(reducer_result)

    def test_shaft_and_bearings(self, reducer_result, symmetric_shaft_inputs, bearing_6205_inputs):
        """Test optional shaft and bearing records."""
        shaft = size_shaft(symmetric_shaft_inputs)
        bearings = [
            select_bearing(bearing_6205_inputs),
            select_bearing(BearingInput(radial_load_n=1000, speed_rpm=500, designation="6205")),
        ]
        files = generate_dat_files(reducer_result, shaft, bearings)

        shaft_values = _values(files["shaft.dat"])
        assert len(shaft_values) == 10
        assert shaft_values[0] == 25.0
        assert shaft_values[6:] == [8.0, 7.0, 4.0, 3.3]

        lines = files["bearing.dat"].splitlines()
        assert len(lines) == 2
        first = lines[0].split(", ")
        assert len(first) == 7
        assert first[0] == "1.00"
        assert first[6] == BEARING_INADEQUATE
        assert float(first[5]) == pytest.approx(bearings[0].l10h_hours, abs=0.005)
        assert lines[1].startswith("2.00, ")
        assert lines[1].endswith(f", {BEARING_ADEQUATE}")

    def test_write_files(self, reducer_result, tmp_path):
        """Test files are written to a new directory."""
        out_dir = tmp_path / "data"
        written = write_dat_files(generate_dat_files(reducer_result), str(out_dir))

        assert len(written) == 3
        assert (out_dir / "devir.dat").read_text().endswith("\n")
        assert all(p.parent == out_dir for p in written)
