"""
Pytest configuration and shared fixtures.
"""

import pytest

from helixcalc.models.inputs import (
    BearingInput,
    GearStageInput,
    ReducerInput,
    ShaftInput,
    StageSettings,
)


@pytest.fixture
def stage_inputs() -> GearStageInput:
    """Provide a typical first-stage gear pair."""
    return GearStageInput(
        power_kw=11.0,
        speed_rpm=1450.0,
        ratio=3.8,
        pinion_teeth=20,
        helix_angle_deg=15.0,
        width_factor=0.6,
        pinion_material="DIN 17 200, Ck 45",
    )


@pytest.fixture
def reducer_inputs() -> ReducerInput:
    """Provide the 1000 -> 100 rpm reducer with z1=20, z3=22."""
    return ReducerInput(
        name="Test Reducer",
        power_kw=7.5,
        input_speed_rpm=1000.0,
        output_speed_rpm=100.0,
        pinion_teeth_stage1=20,
        pinion_teeth_stage2=22,
        stage1=StageSettings(helix_angle_deg=15.0, pinion_material="DIN 17 200, Ck 45"),
        stage2=StageSettings(helix_angle_deg=12.0, pinion_material="DIN 17 200, 46 Cr 2", width_factor=0.8),
    )


@pytest.fixture
def bearing_6205_inputs() -> BearingInput:
    """Provide the explicit 6205 request at 4800 N / 500 rpm."""
    return BearingInput(
        radial_load_n=4800.0,
        axial_load_n=0.0,
        speed_rpm=500.0,
        desired_life_hours=22000.0,
        designation="6205",
    )


@pytest.fixture
def symmetric_shaft_inputs() -> ShaftInput:
    """Provide a symmetric 60/60 mm shaft without axial load."""
    return ShaftInput(
        power_kw=5.0,
        speed_rpm=500.0,
        tangential_force_n=2000.0,
        radial_force_n=800.0,
        axial_force_n=0.0,
        gear_pitch_diameter_mm=120.0,
        span_a_mm=60.0,
        span_b_mm=60.0,
    )
