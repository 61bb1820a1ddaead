"""
Input models for reducer, gear stage, bearing and shaft calculations.

These models are the configuration surface of the engine: every tunable
factor has a documented default. Numeric ranges are validated here; the
formula functions assume valid inputs.
"""

import math
from enum import Enum
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from helixcalc.catalog.data import get_material
from helixcalc.catalog.models import (
    BearingKind,
    DrivenLoad,
    Material,
    MaterialCategory,
    PrimeMover,
)
from helixcalc.physics.constants import (
    DEFAULT_MESH_EFFICIENCY,
    DEFAULT_RATIO_TOLERANCE_PCT,
    STANDARD_PRESSURE_ANGLE_DEG,
)
from helixcalc.physics.tables import round_half_up, working_factor_for

if TYPE_CHECKING:
    from helixcalc.models.outputs import GearStageResult


class LoadDirection(str, Enum):
    """Tooth bending load direction."""
    SINGLE = "single"
    REVERSING = "reversing"


class ContactFactorModel(str, Enum):
    """
    Treatment of the contact ratio in the surface pressure formula.

    ATTENUATED applies Keps = sqrt((4 - eps) / 3); LEGACY uses Keps = 1.
    """
    ATTENUATED = "attenuated"
    LEGACY = "legacy"


class BearingMounting(str, Enum):
    """Bearing arrangement; paired mounting shares the axial load."""
    SINGLE = "single"
    PAIRED = "paired"


class KeywayStyle(str, Enum):
    """Parallel key end form: A rounded (reduces bearing length), B square."""
    A = "A"
    B = "B"


def _check_gear_material(name: Optional[str]) -> Optional[str]:
    if name is not None:
        get_material(name, MaterialCategory.GEAR)
    return name


def _apply_working_factor(model):
    if model.prime_mover is not None and model.driven_load is not None:
        object.__setattr__(
            model, "working_factor", working_factor_for(model.prime_mover, model.driven_load)
        )
    return model


class GearStageInput(BaseModel):
    """
    Parameters for sizing one helical gear pair.

    Forces in N, power in kW, speeds in rpm, angles in degrees.
    """

    # Operating point
    power_kw: float = Field(..., gt=0, description="Transmitted power at the pinion (kW)")
    speed_rpm: float = Field(..., gt=0, description="Pinion speed (rpm)")
    ratio: float = Field(..., gt=0, description="Requested gear ratio z2/z1")
    pinion_teeth: int = Field(default=20, ge=10, description="Pinion tooth count z1")

    # Tooth geometry
    helix_angle_deg: float = Field(default=15.0, ge=0, lt=45, description="Helix angle beta")
    pressure_angle_deg: float = Field(
        default=STANDARD_PRESSURE_ANGLE_DEG,
        gt=0,
        lt=45,
        description="Normal pressure angle alpha_n",
    )
    width_factor: float = Field(
        default=0.6,
        gt=0,
        le=2.0,
        description="Face width factor psi_d = b / d1",
    )

    # Materials
    pinion_material: str = Field(
        default="DIN 17 200, Ck 35",
        description="Pinion material name (gear catalog)",
    )
    gear_material: Optional[str] = Field(
        default=None,
        description="Gear material name (gear catalog). Defaults to the pinion material",
    )

    # Load and safety factors
    working_factor: float = Field(default=1.25, gt=0, description="Application factor Ko")
    prime_mover: Optional[PrimeMover] = Field(
        default=None,
        description="Driving machine; with driven_load, sets working_factor from the Ko table",
    )
    driven_load: Optional[DrivenLoad] = Field(
        default=None,
        description="Driven load character; with prime_mover, sets working_factor from the Ko table",
    )
    dynamic_factor: float = Field(default=1.2, gt=0, description="Dynamic factor Kv")
    bending_safety: float = Field(default=1.5, gt=0, description="Required tooth root safety")
    surface_safety: float = Field(default=1.5, gt=0, description="Required flank safety")
    notch_factor: float = Field(default=1.0, gt=0, description="Root notch factor")
    load_direction: LoadDirection = Field(
        default=LoadDirection.SINGLE,
        description="Single-direction or reversing tooth load",
    )
    contact_factor_model: ContactFactorModel = Field(
        default=ContactFactorModel.ATTENUATED,
        description="Contact ratio factor treatment in the surface criterion",
    )

    # Module selection
    module_override_mm: Optional[float] = Field(
        default=None,
        gt=0,
        description="Use this module instead of the automatic standard module (None = automatic)",
    )

    @field_validator("pinion_material", "gear_material")
    @classmethod
    def validate_material(cls, v: Optional[str]) -> Optional[str]:
        """Ensure materials exist in the gear catalog."""
        return _check_gear_material(v)

    @model_validator(mode="after")
    def set_working_factor(self) -> "GearStageInput":
        """Take Ko from the table when prime mover and driven load are given."""
        return _apply_working_factor(self)

    def get_pinion_material(self) -> Material:
        """Resolved pinion material."""
        return get_material(self.pinion_material, MaterialCategory.GEAR)

    def get_gear_material(self) -> Material:
        """Resolved gear material, falling back to the pinion material."""
        return get_material(self.gear_material or self.pinion_material, MaterialCategory.GEAR)

    model_config = {
        "json_schema_extra": {
            "example": {
                "power_kw": 11.0,
                "speed_rpm": 1450,
                "ratio": 3.8,
                "pinion_teeth": 20,
                "helix_angle_deg": 15,
                "pressure_angle_deg": 20,
                "width_factor": 0.6,
                "pinion_material": "DIN 17 200, Ck 45",
                "working_factor": 1.25,
                "dynamic_factor": 1.2,
                "bending_safety": 1.5,
                "surface_safety": 1.5,
            }
        }
    }


class StageSettings(BaseModel):
    """Per-stage design choices inside a reducer."""
    helix_angle_deg: float = Field(default=15.0, ge=0, lt=45, description="Helix angle beta")
    pressure_angle_deg: float = Field(
        default=STANDARD_PRESSURE_ANGLE_DEG, gt=0, lt=45, description="Normal pressure angle"
    )
    width_factor: float = Field(default=0.6, gt=0, le=2.0, description="Face width factor psi_d")
    pinion_material: str = Field(default="DIN 17 200, Ck 35", description="Pinion material")
    gear_material: Optional[str] = Field(default=None, description="Gear material")
    notch_factor: float = Field(default=1.0, gt=0, description="Root notch factor")
    load_direction: LoadDirection = Field(default=LoadDirection.SINGLE)
    contact_factor_model: ContactFactorModel = Field(default=ContactFactorModel.ATTENUATED)
    module_override_mm: Optional[float] = Field(
        default=None, gt=0, description="Fixed module for this stage (None = automatic)"
    )

    @field_validator("pinion_material", "gear_material")
    @classmethod
    def validate_material(cls, v: Optional[str]) -> Optional[str]:
        """Ensure materials exist in the gear catalog."""
        return _check_gear_material(v)


def _default_stage1() -> StageSettings:
    return StageSettings(helix_angle_deg=15.0, pinion_material="DIN 17 200, Ck 35", width_factor=0.6)


def _default_stage2() -> StageSettings:
    return StageSettings(helix_angle_deg=12.0, pinion_material="DIN 17 200, 46 Cr 2", width_factor=0.8)


class ReducerInput(BaseModel):
    """
    Parameters for a two-stage helical reducer.

    The total ratio is input speed / output speed; it is split over the
    stages by the ratio distribution solver.
    """
    name: str = Field(default="Reducer", description="Design identifier")
    power_kw: float = Field(..., gt=0, description="Input power (kW)")
    input_speed_rpm: float = Field(..., gt=0, description="Motor speed Ng (rpm)")
    output_speed_rpm: float = Field(..., gt=0, description="Required output speed Nc (rpm)")
    pinion_teeth_stage1: int = Field(default=20, ge=10, description="Stage 1 pinion teeth z1")
    pinion_teeth_stage2: int = Field(default=20, ge=10, description="Stage 2 pinion teeth z3")
    efficiency: float = Field(
        default=DEFAULT_MESH_EFFICIENCY,
        gt=0,
        le=1.0,
        description="Mesh efficiency per stage",
    )
    working_factor: float = Field(default=1.25, gt=0, description="Application factor Ko")
    prime_mover: Optional[PrimeMover] = Field(
        default=None,
        description="Driving machine; with driven_load, sets working_factor from the Ko table",
    )
    driven_load: Optional[DrivenLoad] = Field(
        default=None,
        description="Driven load character; with prime_mover, sets working_factor from the Ko table",
    )
    dynamic_factor: float = Field(default=1.2, gt=0, description="Dynamic factor Kv")
    safety_factor: float = Field(default=1.5, gt=0, description="Required bending and surface safety")
    ratio_tolerance_pct: float = Field(
        default=DEFAULT_RATIO_TOLERANCE_PCT,
        ge=0,
        description="Ratio error (%) above which a warning is reported",
    )
    stage1: StageSettings = Field(default_factory=_default_stage1)
    stage2: StageSettings = Field(default_factory=_default_stage2)

    @model_validator(mode="after")
    def set_working_factor(self) -> "ReducerInput":
        """Take Ko from the table when prime mover and driven load are given."""
        return _apply_working_factor(self)

    @model_validator(mode="after")
    def validate_gear_teeth(self) -> "ReducerInput":
        """Reject speed ratios whose gear tooth counts round to zero."""
        target = self.input_speed_rpm / self.output_speed_rpm
        stage1 = math.sqrt(target)
        for stage, pinion_teeth, ratio in (
            (1, self.pinion_teeth_stage1, stage1),
            (2, self.pinion_teeth_stage2, target / stage1),
        ):
            if round_half_up(pinion_teeth * ratio) < 1:
                raise ValueError(
                    f"Stage {stage} gear rounds to zero teeth for a total ratio of {target:.6g}"
                )
        return self

    def stage_input(
        self,
        settings: StageSettings,
        power_kw: float,
        speed_rpm: float,
        ratio: float,
        pinion_teeth: int,
    ) -> GearStageInput:
        """Build the stage sizer input for one stage of this reducer."""
        return GearStageInput(
            power_kw=power_kw,
            speed_rpm=speed_rpm,
            ratio=ratio,
            pinion_teeth=pinion_teeth,
            working_factor=self.working_factor,
            dynamic_factor=self.dynamic_factor,
            bending_safety=self.safety_factor,
            surface_safety=self.safety_factor,
            **settings.model_dump(),
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "RD-11kW",
                "power_kw": 11.0,
                "input_speed_rpm": 1450,
                "output_speed_rpm": 100,
                "pinion_teeth_stage1": 20,
                "pinion_teeth_stage2": 20,
                "efficiency": 0.95,
                "working_factor": 1.25,
                "safety_factor": 1.5,
                "stage1": {"helix_angle_deg": 15, "pinion_material": "DIN 17 200, Ck 35", "width_factor": 0.6},
                "stage2": {"helix_angle_deg": 12, "pinion_material": "DIN 17 200, 46 Cr 2", "width_factor": 0.8},
            }
        }
    }


class BearingInput(BaseModel):
    """
    Bearing life request.

    Give either a catalog designation (explicit selection) or a required
    bore diameter (auto search over bearings of the requested kind).
    """
    radial_load_n: float = Field(..., ge=0, description="Radial load Fr (N)")
    axial_load_n: float = Field(default=0.0, ge=0, description="Axial load Fa (N)")
    speed_rpm: float = Field(..., gt=0, description="Shaft speed (rpm)")
    desired_life_hours: float = Field(default=22000.0, gt=0, description="Required L10h (h)")
    designation: Optional[str] = Field(
        default=None,
        description="Catalog designation for explicit selection, e.g. '6205'",
    )
    bore_diameter_mm: Optional[float] = Field(
        default=None,
        gt=0,
        description="Minimum bore diameter for auto search (mm)",
    )
    kind: BearingKind = Field(
        default=BearingKind.DEEP_GROOVE_BALL,
        description="Bearing kind considered by the auto search",
    )
    mounting: BearingMounting = Field(
        default=BearingMounting.SINGLE,
        description="Paired mounting halves the effective axial load",
    )

    @model_validator(mode="after")
    def validate_loads(self) -> "BearingInput":
        """At least one load component must be present."""
        if self.radial_load_n == 0 and self.axial_load_n == 0:
            raise ValueError("radial_load_n and axial_load_n cannot both be zero")
        return self

    @property
    def effective_axial_load_n(self) -> float:
        """Axial load carried by one bearing."""
        if self.mounting == BearingMounting.PAIRED:
            return self.axial_load_n / 2
        return self.axial_load_n

    model_config = {
        "json_schema_extra": {
            "example": {
                "radial_load_n": 4800,
                "axial_load_n": 1000,
                "speed_rpm": 500,
                "desired_life_hours": 22000,
                "bore_diameter_mm": 25,
                "kind": "deep_groove_ball",
                "mounting": "single",
            }
        }
    }


class ShaftInput(BaseModel):
    """
    Shaft carrying one gear between two bearings.

    The gear sits at distance span_a_mm from bearing A and span_b_mm from
    bearing B. Forces in N, lengths in mm.
    """
    power_kw: float = Field(..., gt=0, description="Transmitted power (kW)")
    speed_rpm: float = Field(..., gt=0, description="Shaft speed (rpm)")
    tangential_force_n: float = Field(..., ge=0, description="Gear tangential force Ft")
    radial_force_n: float = Field(default=0.0, ge=0, description="Gear radial force Fr")
    axial_force_n: float = Field(default=0.0, ge=0, description="Gear axial force Fa")
    gear_pitch_diameter_mm: float = Field(..., gt=0, description="Gear pitch diameter d")
    span_a_mm: float = Field(default=60.0, gt=0, description="Gear to bearing A distance L1")
    span_b_mm: float = Field(default=60.0, gt=0, description="Gear to bearing B distance L2")
    material: str = Field(default="DIN 17 100, St 37", description="Shaft material name")
    material_category: MaterialCategory = Field(
        default=MaterialCategory.GENERAL,
        description="Catalog the shaft material is taken from",
    )
    safety_factor: float = Field(default=2.0, gt=0, description="Required static safety")
    keyway_style: KeywayStyle = Field(default=KeywayStyle.A, description="Parallel key end form")
    fatigue_correction: bool = Field(
        default=False,
        description="Scale the bending moment by sigma_K / sigma_D in the equivalent moment",
    )

    @model_validator(mode="after")
    def validate_material(self) -> "ShaftInput":
        """Ensure the material exists in the selected catalog."""
        get_material(self.material, self.material_category)
        return self

    def get_material(self) -> Material:
        """Resolved shaft material."""
        return get_material(self.material, self.material_category)

    @property
    def total_span_mm(self) -> float:
        """Bearing distance L = L1 + L2."""
        return self.span_a_mm + self.span_b_mm

    @classmethod
    def from_stage(
        cls,
        stage: "GearStageResult",
        driven: bool = True,
        **overrides,
    ) -> "ShaftInput":
        """
        Seed a shaft calculation from a sized gear stage.

        Args:
            stage: Result of the gear stage sizer
            driven: True for the gear (output) shaft, False for the pinion shaft
            **overrides: Any other ShaftInput field (spans, material, ...)
        """
        forces = stage.gear_forces if driven else stage.pinion_forces
        values = {
            "power_kw": stage.power_kw,
            "speed_rpm": stage.output_speed_rpm if driven else stage.speed_rpm,
            "tangential_force_n": forces.tangential_n,
            "radial_force_n": forces.radial_n,
            "axial_force_n": forces.axial_n,
            "gear_pitch_diameter_mm": forces.pitch_diameter_mm,
        }
        values.update(overrides)
        return cls(**values)

    model_config = {
        "json_schema_extra": {
            "example": {
                "power_kw": 9.0,
                "speed_rpm": 1000,
                "tangential_force_n": 2000,
                "radial_force_n": 800,
                "axial_force_n": 400,
                "gear_pitch_diameter_mm": 100,
                "span_a_mm": 60,
                "span_b_mm": 60,
                "material": "DIN 17 100, St 37",
                "material_category": "general",
                "safety_factor": 2.0,
                "keyway_style": "A",
            }
        }
    }


class DrawingPositions(BaseModel):
    """
    Gear positions along the shafts for the drafting layout.

    Center distances default to the sized stages.
    """
    yn1_mm: float = Field(..., description="Stage 1 pinion position YN1 (mm)")
    yn2_mm: float = Field(..., description="Stage 1 gear position YN2 (mm)")
    yn3_mm: float = Field(..., description="Stage 2 pinion position YN3 (mm)")
    yn4_mm: float = Field(..., description="Stage 2 gear position YN4 (mm)")
    ao1_mm: Optional[float] = Field(default=None, gt=0, description="Stage 1 center distance (mm)")
    ao2_mm: Optional[float] = Field(default=None, gt=0, description="Stage 2 center distance (mm)")


EXAMPLE_MODELS: dict[str, type[BaseModel]] = {
    "reducer": ReducerInput,
    "stage": GearStageInput,
    "bearing": BearingInput,
    "shaft": ShaftInput,
}


def example_input(kind: str) -> BaseModel:
    """
    Validated example input of one kind.

    Args:
        kind: One of 'reducer', 'stage', 'bearing', 'shaft'

    Raises:
        ValueError: If the kind is unknown
    """
    try:
        model_cls = EXAMPLE_MODELS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown example kind {kind!r}; choose from {', '.join(EXAMPLE_MODELS)}"
        ) from None
    return model_cls(**model_cls.model_config["json_schema_extra"]["example"])
