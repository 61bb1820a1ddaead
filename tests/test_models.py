"""
Tests for Pydantic input models and validation.
"""

import pytest
from pydantic import ValidationError

from helixcalc.models import (
    BearingInput,
    GearStageInput,
    ReducerInput,
    ShaftInput,
    StageSettings,
    example_input,
)
from helixcalc.models.inputs import BearingMounting, ContactFactorModel, LoadDirection


class TestGearStageInput:
    """Tests for GearStageInput validation."""

    def test_defaults(self):
        """Test documented defaults."""
        inputs = GearStageInput(power_kw=5, speed_rpm=1000, ratio=3)

        assert inputs.pinion_teeth == 20
        assert inputs.pressure_angle_deg == 20.0
        assert inputs.working_factor == 1.25
        assert inputs.dynamic_factor == 1.2
        assert inputs.load_direction == LoadDirection.SINGLE
        assert inputs.contact_factor_model == ContactFactorModel.ATTENUATED
        assert inputs.module_override_mm is None

    def test_rejects_non_positive_power(self):
        """Test power must be positive."""
        with pytest.raises(ValidationError):
            GearStageInput(power_kw=0, speed_rpm=1000, ratio=3)

    def test_rejects_few_teeth(self):
        """Test pinion tooth counts below 10 are rejected."""
        with pytest.raises(ValidationError):
            GearStageInput(power_kw=5, speed_rpm=1000, ratio=3, pinion_teeth=8)

    def test_rejects_unknown_material(self):
        """Test materials must exist in the gear catalog."""
        with pytest.raises(ValidationError):
            GearStageInput(power_kw=5, speed_rpm=1000, ratio=3, pinion_material="Unobtainium")

    def test_general_material_not_a_gear_material(self):
        """Test general-only grades are not accepted for gears."""
        with pytest.raises(ValidationError):
            GearStageInput(power_kw=5, speed_rpm=1000, ratio=3, pinion_material="DIN 17 100, St 37")

    def test_gear_material_defaults_to_pinion(self):
        """Test the gear uses the pinion material unless given."""
        inputs = GearStageInput(power_kw=5, speed_rpm=1000, ratio=3, pinion_material="DIN 17 200, Ck 45")
        assert inputs.get_gear_material().name == "DIN 17 200, Ck 45"

    def test_working_factor_from_table(self):
        """Test prime mover and driven load override Ko."""
        inputs = GearStageInput(
            power_kw=5,
            speed_rpm=1000,
            ratio=3,
            working_factor=1.0,
            prime_mover="single_cylinder_engine",
            driven_load="heavy_shock",
        )
        assert inputs.working_factor == 2.25

    def test_working_factor_needs_both_axes(self):
        """Test a prime mover alone keeps the explicit Ko."""
        inputs = GearStageInput(
            power_kw=5, speed_rpm=1000, ratio=3, working_factor=1.1, prime_mover="electric_motor"
        )
        assert inputs.working_factor == 1.1


class TestReducerInput:
    """Tests for ReducerInput."""

    def test_default_stage_settings(self):
        """Test default stage materials and helix angles."""
        inputs = ReducerInput(power_kw=5, input_speed_rpm=1450, output_speed_rpm=100)

        assert inputs.stage1.helix_angle_deg == 15.0
        assert inputs.stage2.helix_angle_deg == 12.0
        assert inputs.stage2.pinion_material == "DIN 17 200, 46 Cr 2"
        assert inputs.efficiency == 0.95
        assert inputs.ratio_tolerance_pct == 3.0

    def test_rejects_efficiency_above_one(self):
        """Test efficiency is a fraction."""
        with pytest.raises(ValidationError):
            ReducerInput(power_kw=5, input_speed_rpm=1450, output_speed_rpm=100, efficiency=1.2)

    def test_rejects_gear_with_zero_teeth(self):
        """Test a speed ratio whose gear rounds to zero teeth is rejected."""
        with pytest.raises(ValidationError, match="zero teeth"):
            ReducerInput(power_kw=5, input_speed_rpm=1, output_speed_rpm=10000)

    def test_stage_input_carries_shared_factors(self):
        """Test stage inputs inherit Ko, Kv and safety."""
        inputs = ReducerInput(
            power_kw=5,
            input_speed_rpm=1450,
            output_speed_rpm=100,
            dynamic_factor=1.4,
            safety_factor=2.0,
            stage1=StageSettings(module_override_mm=3.0),
        )
        stage = inputs.stage_input(inputs.stage1, power_kw=5, speed_rpm=1450, ratio=3.8, pinion_teeth=20)

        assert stage.dynamic_factor == 1.4
        assert stage.bending_safety == 2.0
        assert stage.surface_safety == 2.0
        assert stage.module_override_mm == 3.0


class TestBearingInput:
    """Tests for BearingInput."""

    def test_rejects_zero_loads(self):
        """Test at least one load component is required."""
        with pytest.raises(ValidationError):
            BearingInput(radial_load_n=0, axial_load_n=0, speed_rpm=500, designation="6205")

    def test_pure_axial_load_allowed(self):
        """Test a purely axial load is valid."""
        inputs = BearingInput(radial_load_n=0, axial_load_n=500, speed_rpm=500, designation="6205")
        assert inputs.effective_axial_load_n == 500

    def test_paired_mounting(self):
        """Test paired mounting halves the axial load per bearing."""
        inputs = BearingInput(
            radial_load_n=1000, axial_load_n=800, speed_rpm=500, mounting=BearingMounting.PAIRED
        )
        assert inputs.effective_axial_load_n == 400

    def test_rejects_negative_load(self):
        """Test loads cannot be negative."""
        with pytest.raises(ValidationError):
            BearingInput(radial_load_n=-1, speed_rpm=500)


class TestShaftInput:
    """Tests for ShaftInput."""

    def test_rejects_unknown_material(self):
        """Test the material must exist in the selected catalog."""
        with pytest.raises(ValidationError):
            ShaftInput(
                power_kw=5,
                speed_rpm=500,
                tangential_force_n=2000,
                gear_pitch_diameter_mm=120,
                material="DIN 17 200, 36 CrNiMo 4",
                material_category="gear",
            )

    def test_material_category(self):
        """Test gear-grade shafts resolve from the gear catalog."""
        inputs = ShaftInput(
            power_kw=5,
            speed_rpm=500,
            tangential_force_n=2000,
            gear_pitch_diameter_mm=120,
            material="DIN 17 200, Ck 45",
            material_category="gear",
        )
        assert inputs.get_material().durability_limit_mpa == 350

    def test_total_span(self):
        """Test L = L1 + L2."""
        inputs = ShaftInput(
            power_kw=5, speed_rpm=500, tangential_force_n=2000, gear_pitch_diameter_mm=120,
            span_a_mm=45, span_b_mm=75,
        )
        assert inputs.total_span_mm == 120


class TestExamples:
    """Tests for example inputs."""

    @pytest.mark.parametrize("kind,model", [
        ("reducer", ReducerInput),
        ("stage", GearStageInput),
        ("bearing", BearingInput),
        ("shaft", ShaftInput),
    ])
    def test_examples_validate(self, kind, model):
        """Test every schema example builds a valid model."""
        assert isinstance(example_input(kind), model)

    def test_unknown_example(self):
        """Test unknown kinds raise ValueError."""
        with pytest.raises(ValueError):
            example_input("gearbox")
