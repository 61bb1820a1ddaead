"""
Pydantic models for reducer calculation inputs and outputs.
"""

from helixcalc.models.inputs import (
    BearingInput,
    BearingMounting,
    ContactFactorModel,
    DrawingPositions,
    GearStageInput,
    KeywayStyle,
    LoadDirection,
    ReducerInput,
    ShaftInput,
    StageSettings,
    example_input,
)
from helixcalc.models.outputs import (
    BearingResult,
    GearForces,
    GearStageResult,
    GoverningCriterion,
    KeywayCheck,
    RatioAnalysis,
    ReducerResult,
    SelectionMode,
    ShaftExtension,
    ShaftReactions,
    ShaftResult,
    SpeedCascade,
    SpeedCheck,
    StageFactors,
    StageGeometry,
    StageSafety,
    StageStresses,
    StaticCheck,
    ToothCounts,
)

__all__ = [
    "BearingInput",
    "BearingMounting",
    "ContactFactorModel",
    "DrawingPositions",
    "GearStageInput",
    "KeywayStyle",
    "LoadDirection",
    "ReducerInput",
    "ShaftInput",
    "StageSettings",
    "example_input",
    "BearingResult",
    "GearForces",
    "GearStageResult",
    "GoverningCriterion",
    "KeywayCheck",
    "RatioAnalysis",
    "ReducerResult",
    "SelectionMode",
    "ShaftExtension",
    "ShaftReactions",
    "ShaftResult",
    "SpeedCascade",
    "SpeedCheck",
    "StageFactors",
    "StageGeometry",
    "StageSafety",
    "StageStresses",
    "StaticCheck",
    "ToothCounts",
]
