"""
Helical Reducer Calculator (helixcalc)

Sizes two-stage helical gear reducers with the DIN hand-calculation method:
ratio distribution, gear stage sizing, rolling bearing life selection and
shaft sizing with a parallel key.

Usage:
    python -m helixcalc make-example --kind reducer
    python -m helixcalc reducer --input reducer_input.json
    python -m helixcalc bearing --input bearing_input.json
    python -m helixcalc serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "helixcalc"

from helixcalc.models.inputs import (
    BearingInput,
    GearStageInput,
    ReducerInput,
    ShaftInput,
)
from helixcalc.models.outputs import (
    BearingResult,
    GearStageResult,
    ReducerResult,
    ShaftResult,
)
from helixcalc.physics.ratio import distribute_ratio
from helixcalc.generator.stage import size_gear_stage
from helixcalc.generator.reducer import size_reducer
from helixcalc.generator.shaft import size_shaft
from helixcalc.catalog.matcher import select_bearing

__all__ = [
    "BearingInput",
    "GearStageInput",
    "ReducerInput",
    "ShaftInput",
    "BearingResult",
    "GearStageResult",
    "ReducerResult",
    "ShaftResult",
    "distribute_ratio",
    "size_gear_stage",
    "size_reducer",
    "size_shaft",
    "select_bearing",
]
