"""
Output models for reducer, gear stage, bearing and shaft calculations.

Results carry full floating point precision; rounding is left to reports
and exports.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from helixcalc.catalog.models import BearingCatalogEntry, Keyway


class GoverningCriterion(str, Enum):
    """Criterion that set the theoretical module."""
    BENDING = "bending"
    SURFACE_PRESSURE = "surface_pressure"


class SelectionMode(str, Enum):
    """How a bearing was chosen."""
    EXPLICIT = "explicit"
    AUTO_SEARCH = "auto_search"


# =============================================================================
# Gear stage
# =============================================================================

class GearForces(BaseModel):
    """Mesh forces acting on one gear of the pair (N)."""
    tangential_n: float = Field(..., description="Tangential force Ft")
    radial_n: float = Field(..., description="Radial force Fr")
    axial_n: float = Field(..., description="Axial force Fa")
    pitch_diameter_mm: float = Field(..., description="Pitch diameter the forces act on")


class StageGeometry(BaseModel):
    """
    Gear pair geometry at the selected module.

    All dimensions in mm.
    """
    module_mm: float = Field(..., description="Selected normal module")
    pinion_teeth: int = Field(..., description="Pinion tooth count z1")
    gear_teeth: int = Field(..., description="Gear tooth count z2")
    pitch_diameter_pinion_mm: float
    pitch_diameter_gear_mm: float
    tip_diameter_pinion_mm: float
    tip_diameter_gear_mm: float
    root_diameter_pinion_mm: float
    root_diameter_gear_mm: float
    center_distance_mm: float
    face_width_mm: float


class StageFactors(BaseModel):
    """Empirical factors used in the sizing."""
    form_factor_pinion: float = Field(..., description="Kf at the pinion equivalent tooth count")
    form_factor_gear: float = Field(..., description="Kf at the gear equivalent tooth count")
    helix_factor: float = Field(..., description="Kb")
    elastic_factor: float = Field(..., description="Ke")
    ratio_factor: float = Field(..., description="Ki")
    rolling_factor: float = Field(..., description="Kalpha")
    contact_ratio: float = Field(..., description="Transverse contact ratio eps")
    contact_ratio_factor: float = Field(..., description="Keps")
    working_factor: float = Field(..., description="Ko")
    dynamic_factor: float = Field(..., description="Kv")


class StageStresses(BaseModel):
    """Actual and allowable stresses at the selected module (MPa)."""
    root_stress_pinion_mpa: float
    root_stress_gear_mpa: float
    allowable_root_stress_pinion_mpa: float
    allowable_root_stress_gear_mpa: float
    contact_pressure_mpa: float
    allowable_pressure_pinion_mpa: float
    allowable_pressure_gear_mpa: float


class StageSafety(BaseModel):
    """Achieved safety factors at the selected module."""
    bending_pinion: float = Field(..., description="Tooth root safety, pinion")
    bending_gear: float = Field(..., description="Tooth root safety, gear")
    surface_pinion: float = Field(..., description="Flank safety, pinion")
    surface_gear: float = Field(..., description="Flank safety, gear")
    required_bending: float
    required_surface: float
    bending_ok: bool
    surface_ok: bool


class GearStageResult(BaseModel):
    """
    Sizing result of one helical gear pair.

    Safety factors always refer to the selected standard module.
    """
    name: str = Field(..., description="Stage label")
    power_kw: float
    speed_rpm: float = Field(..., description="Pinion speed")
    output_speed_rpm: float = Field(..., description="Gear speed n / u")
    ratio_target: float
    ratio_actual: float = Field(..., description="z2 / z1")
    torque_nm: float = Field(..., description="Pinion torque")
    helix_angle_deg: float
    pressure_angle_deg: float
    bending_module_mm: float = Field(..., description="Module required by tooth root bending")
    surface_module_mm: float = Field(..., description="Module required by surface pressure")
    theoretical_module_mm: float = Field(..., description="max(bending, surface)")
    governing_criterion: GoverningCriterion
    module_overridden: bool = Field(default=False, description="Module set explicitly by caller")
    geometry: StageGeometry
    pinion_forces: GearForces
    gear_forces: GearForces
    factors: StageFactors
    stresses: StageStresses
    safety: StageSafety
    pinion_material: str
    gear_material: str
    warnings: list[str] = Field(default_factory=list)

    @property
    def is_adequate(self) -> bool:
        """Both criteria met at the selected module."""
        return self.safety.bending_ok and self.safety.surface_ok


# =============================================================================
# Reducer
# =============================================================================

class RatioAnalysis(BaseModel):
    """Target versus achieved reduction ratios."""
    target_ratio: float
    stage1_theoretical: float
    stage2_theoretical: float
    stage1_ratio: float
    stage2_ratio: float
    actual_ratio: float = Field(..., description="stage1_ratio * stage2_ratio")
    error_pct: float = Field(..., ge=0, description="|target - actual| / target * 100")


class SpeedCascade(BaseModel):
    """Shaft speeds through the reducer (rpm)."""
    input_rpm: float
    intermediate_rpm: float
    output_nominal_rpm: float
    output_actual_rpm: float


class ToothCounts(BaseModel):
    """Tooth counts of both stages."""
    z1: int
    z2: int
    z3: int
    z4: int


class ReducerResult(BaseModel):
    """Complete two-stage reducer sizing result."""
    name: str
    stage1: GearStageResult
    stage2: GearStageResult
    ratio_analysis: RatioAnalysis
    speeds: SpeedCascade
    tooth_counts: ToothCounts
    total_ratio_actual: float
    input_power_kw: float
    output_power_kw: float
    output_torque_nm: float = Field(..., description="9550 * P * eta^2 / Nc")
    warnings: list[str] = Field(default_factory=list)

    @property
    def is_adequate(self) -> bool:
        """Both stages meet their safety requirements."""
        return self.stage1.is_adequate and self.stage2.is_adequate


# =============================================================================
# Bearing
# =============================================================================

class StaticCheck(BaseModel):
    """Static load safety S0 = C0 / P0."""
    equivalent_static_load_n: float
    static_load_rating_n: float
    safety: float
    required_safety: float
    is_safe: bool


class SpeedCheck(BaseModel):
    """Operating speed against catalog limiting speeds."""
    speed_rpm: float
    limit_grease_rpm: Optional[float] = None
    limit_oil_rpm: Optional[float] = None
    grease_ok: Optional[bool] = None
    oil_ok: Optional[bool] = None


class BearingResult(BaseModel):
    """Life evaluation of one catalog bearing."""
    bearing: BearingCatalogEntry
    selection_mode: SelectionMode
    x_factor: float
    y_factor: float
    e_factor: float
    radial_load_n: float
    effective_axial_load_n: float
    equivalent_load_n: float = Field(..., description="P = X Fr + Y Fa")
    life_exponent: float
    l10_million_rev: float
    l10h_hours: float
    desired_life_hours: float
    required_dynamic_load_n: float = Field(..., description="C needed for the desired life")
    life_ratio: float = Field(..., description="L10h / desired life")
    is_adequate: bool
    status: str
    static_check: StaticCheck
    speed_check: Optional[SpeedCheck] = None
    candidates_evaluated: int = Field(default=1, ge=1)
    warnings: list[str] = Field(default_factory=list)


# =============================================================================
# Shaft
# =============================================================================

class ShaftReactions(BaseModel):
    """Bearing reactions (N)."""
    a_vertical_n: float
    b_vertical_n: float
    a_horizontal_n: float
    b_horizontal_n: float
    a_resultant_n: float
    b_resultant_n: float


class ShaftExtension(BaseModel):
    """Standard cylindrical shaft end (mm)."""
    diameter_mm: float
    length_mm: float


class KeywayCheck(BaseModel):
    """Parallel key hub pressure check."""
    keyway: Keyway
    style: str
    hub_length_mm: float
    effective_length_mm: float
    force_n: float
    pressure_mpa: float
    allowable_pressure_mpa: float
    safety: float
    is_safe: bool


class ShaftResult(BaseModel):
    """Shaft sizing result."""
    torque_nm: float
    reactions: ShaftReactions
    bending_moment_nm: float
    fatigue_multiplier: float = Field(default=1.0, description="k applied to Mb in Mv")
    equivalent_moment_nm: float
    allowable_stress_mpa: float = Field(..., description="sigma_Ak / S")
    minimum_diameter_mm: float
    standard_diameter_mm: float
    bending_stress_mpa: float
    shear_stress_mpa: float
    equivalent_stress_mpa: float
    is_safe: bool = Field(..., description="Bending stress below allowable at the standard diameter")
    extension: ShaftExtension
    keyway_check: KeywayCheck
    material: str
    warnings: list[str] = Field(default_factory=list)
