"""
Tests for the two-stage reducer designer.
"""

import logging

import pytest

from helixcalc.generator.reducer import ReducerDesigner, size_reducer
from helixcalc.models.inputs import ReducerInput


class TestReducerDesigner:
    """Tests for ReducerDesigner."""

    def test_tooth_counts(self, reducer_inputs):
        """Test the stages use the distributed tooth counts."""
        result = size_reducer(reducer_inputs)

        assert (result.tooth_counts.z1, result.tooth_counts.z2) == (20, 63)
        assert (result.tooth_counts.z3, result.tooth_counts.z4) == (22, 70)
        assert result.stage1.geometry.gear_teeth == 63
        assert result.stage2.geometry.gear_teeth == 70

    def test_total_ratio(self, reducer_inputs):
        """Test the total ratio is the product of the stage ratios."""
        result = size_reducer(reducer_inputs)

        assert result.total_ratio_actual == pytest.approx(
            result.stage1.ratio_actual * result.stage2.ratio_actual
        )
        assert result.ratio_analysis.error_pct == pytest.approx(0.227, abs=0.001)

    def test_power_cascade(self, reducer_inputs):
        """Test stage 2 carries P * eta and the output P * eta^2."""
        result = size_reducer(reducer_inputs)

        assert result.stage1.power_kw == pytest.approx(7.5)
        assert result.stage2.power_kw == pytest.approx(7.5 * 0.95)
        assert result.output_power_kw == pytest.approx(7.5 * 0.95 ** 2)

    def test_speed_cascade(self, reducer_inputs):
        """Test stage 2 runs at the achieved intermediate speed."""
        result = size_reducer(reducer_inputs)

        assert result.stage1.speed_rpm == pytest.approx(1000.0)
        assert result.stage2.speed_rpm == pytest.approx(1000 / (63 / 20))
        assert result.speeds.intermediate_rpm == pytest.approx(result.stage2.speed_rpm)
        assert result.speeds.output_actual_rpm == pytest.approx(result.stage2.output_speed_rpm)

    def test_output_torque(self, reducer_inputs):
        """Test output torque at the nominal output speed."""
        result = size_reducer(reducer_inputs)
        assert result.output_torque_nm == pytest.approx(9550 * 7.5 * 0.95 ** 2 / 100)

    def test_stage_settings_applied(self, reducer_inputs):
        """Test per-stage materials and angles reach the stage sizer."""
        result = size_reducer(reducer_inputs)

        assert result.stage1.name == "Stage 1"
        assert result.stage2.name == "Stage 2"
        assert result.stage1.pinion_material == "DIN 17 200, Ck 45"
        assert result.stage2.pinion_material == "DIN 17 200, 46 Cr 2"
        assert result.stage2.helix_angle_deg == 12.0

    def test_second_stage_carries_more_torque(self, reducer_inputs):
        """Test the slower stage needs at least as large a module."""
        result = size_reducer(reducer_inputs)

        assert result.stage2.torque_nm > result.stage1.torque_nm
        assert result.stage2.geometry.module_mm >= result.stage1.geometry.module_mm

    def test_within_tolerance_no_ratio_warning(self, reducer_inputs):
        """Test no ratio warning inside the default 3% tolerance."""
        result = size_reducer(reducer_inputs)

        assert not any("Ratio error" in w for w in result.warnings)
        assert result.is_adequate

    def test_ratio_warning(self, reducer_inputs, caplog):
        """Test a tight tolerance reports and logs the ratio error."""
        inputs = reducer_inputs.model_copy(update={"ratio_tolerance_pct": 0.1})

        with caplog.at_level(logging.WARNING, logger="helixcalc.generator.reducer"):
            result = size_reducer(inputs)

        assert any("Ratio error" in w for w in result.warnings)
        assert "Ratio error" in caplog.text

    def test_designer_power_attributes(self, reducer_inputs):
        """Test designer exposes the power after each mesh."""
        designer = ReducerDesigner(reducer_inputs)

        assert designer.stage2_power_kw == pytest.approx(7.125)
        assert designer.output_power_kw == pytest.approx(6.76875)

    def test_working_factor_from_table(self):
        """Test prime mover and driven load set Ko for both stages."""
        inputs = ReducerInput(
            power_kw=5.0,
            input_speed_rpm=1450,
            output_speed_rpm=100,
            prime_mover="multi_cylinder_engine",
            driven_load="moderate_shock",
        )
        result = size_reducer(inputs)

        assert result.stage1.factors.working_factor == 1.5
        assert result.stage2.factors.working_factor == 1.5

    def test_stage_warnings_logged_once(self, caplog):
        """Test a stage warning is logged by the stage only, not again by the reducer."""
        inputs = ReducerInput(power_kw=5000, input_speed_rpm=20, output_speed_rpm=1.25)

        with caplog.at_level(logging.WARNING):
            result = size_reducer(inputs)

        overflow = [w for w in result.warnings if w.startswith("Stage 1") and "standard module" in w]
        assert len(overflow) == 1
        logged = [r for r in caplog.records if r.getMessage() == overflow[0]]
        assert len(logged) == 1
        assert logged[0].name == "helixcalc.generator.stage"
