"""
Pydantic models for catalog data.

Materials, rolling bearings and parallel keys are immutable catalog rows;
they are built once at import time and shared by every calculation.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class MaterialCategory(str, Enum):
    """Material catalog the entry belongs to."""
    GEAR = "gear"
    GENERAL = "general"


class BearingKind(str, Enum):
    """Rolling bearing construction."""
    DEEP_GROOVE_BALL = "deep_groove_ball"
    SELF_ALIGNING_BALL = "self_aligning_ball"
    ANGULAR_CONTACT_BALL = "angular_contact_ball"
    TAPERED_ROLLER = "tapered_roller"
    CYLINDRICAL_ROLLER = "cylindrical_roller"

    @property
    def is_ball(self) -> bool:
        """Whether the rolling elements are balls."""
        return self in (
            BearingKind.DEEP_GROOVE_BALL,
            BearingKind.SELF_ALIGNING_BALL,
            BearingKind.ANGULAR_CONTACT_BALL,
        )


class Material(BaseModel):
    """
    Material properties for gears and shafts.

    Gear-grade entries carry a durability limit and an allowable surface
    pressure; general-grade entries leave both at zero and carry Poisson's
    ratio instead. All stresses and moduli in MPa (N/mm^2).
    """
    name: str = Field(..., description="DIN designation, e.g. 'DIN 17 200, Ck 45'")
    category: MaterialCategory = Field(..., description="Catalog the material is listed in")
    ultimate_strength_mpa: float = Field(..., gt=0, description="Tensile strength sigma_K")
    yield_strength_mpa: float = Field(..., gt=0, description="Yield strength sigma_Ak")
    durability_limit_mpa: float = Field(
        default=0.0,
        ge=0,
        description="Bending fatigue (durability) limit sigma_D; 0 when not tabulated",
    )
    elastic_modulus_mpa: float = Field(..., gt=0, description="Young's modulus E")
    shear_modulus_mpa: float = Field(..., gt=0, description="Shear modulus G")
    hardness_hb: float = Field(..., gt=0, description="Brinell hardness")
    surface_pressure_mpa: float = Field(
        default=0.0,
        ge=0,
        description="Allowable Hertzian surface pressure PhD; 0 when not tabulated",
    )
    poisson: Optional[float] = Field(default=None, description="Poisson's ratio")

    model_config = {"frozen": True}


class BearingCatalogEntry(BaseModel):
    """
    Rolling bearing catalog row.

    Dimensions in mm, load ratings in N, speed limits in rpm.
    """
    designation: str = Field(..., description="Catalog designation, e.g. '6205'")
    bore_mm: float = Field(..., gt=0, description="Bore diameter d")
    outer_diameter_mm: float = Field(..., gt=0, description="Outer diameter D")
    width_mm: float = Field(..., gt=0, description="Width B")
    dynamic_load_n: float = Field(..., gt=0, description="Basic dynamic load rating C")
    static_load_n: float = Field(..., gt=0, description="Basic static load rating C0")
    kind: BearingKind = Field(..., description="Bearing construction")
    limiting_speed_grease_rpm: Optional[float] = Field(
        default=None, gt=0, description="Limiting speed with grease lubrication"
    )
    limiting_speed_oil_rpm: Optional[float] = Field(
        default=None, gt=0, description="Limiting speed with oil lubrication"
    )
    manufacturer: str = Field(default="SKF", description="Catalog source")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "designation": "6205",
                "bore_mm": 25,
                "outer_diameter_mm": 52,
                "width_mm": 15,
                "dynamic_load_n": 14000,
                "static_load_n": 7800,
                "kind": "deep_groove_ball",
                "limiting_speed_grease_rpm": 15000,
                "limiting_speed_oil_rpm": 18000,
                "manufacturer": "SKF",
            }
        },
    }

    @property
    def is_ball(self) -> bool:
        """Whether the bearing is a ball bearing."""
        return self.kind.is_ball

    @property
    def life_exponent(self) -> float:
        """Life equation exponent: 3 for ball, 10/3 for roller bearings."""
        return 3.0 if self.is_ball else 10.0 / 3.0


class Keyway(BaseModel):
    """
    DIN 6885 parallel key band.

    Applies to shaft diameters with d_min < d <= d_max. All dimensions in mm.
    """
    d_min_mm: float = Field(..., description="Lower (exclusive) shaft diameter bound")
    d_max_mm: float = Field(..., description="Upper (inclusive) shaft diameter bound")
    width_mm: float = Field(..., gt=0, description="Key width b")
    height_mm: float = Field(..., gt=0, description="Key height h")
    shaft_depth_mm: float = Field(..., gt=0, description="Shaft groove depth t1")
    hub_depth_mm: float = Field(..., gt=0, description="Hub groove depth t2")

    model_config = {"frozen": True}

    def covers(self, diameter_mm: float) -> bool:
        """Whether a shaft diameter falls in this band."""
        return self.d_min_mm < diameter_mm <= self.d_max_mm


class PrimeMover(str, Enum):
    """Driving machine, first axis of the working factor table."""
    ELECTRIC_MOTOR = "electric_motor"
    MULTI_CYLINDER_ENGINE = "multi_cylinder_engine"
    SINGLE_CYLINDER_ENGINE = "single_cylinder_engine"


class DrivenLoad(str, Enum):
    """Driven machine load character, second axis of the working factor table."""
    UNIFORM = "uniform"
    MODERATE_SHOCK = "moderate_shock"
    HEAVY_SHOCK = "heavy_shock"
