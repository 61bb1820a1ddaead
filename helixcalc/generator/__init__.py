"""
Designers for gear stages, two-stage reducers and shafts.

Each designer takes a validated input model and builds a result model.
"""

from helixcalc.generator.stage import GearStageDesigner, size_gear_stage
from helixcalc.generator.reducer import ReducerDesigner, size_reducer
from helixcalc.generator.shaft import ShaftDesigner, size_shaft

__all__ = [
    "GearStageDesigner",
    "size_gear_stage",
    "ReducerDesigner",
    "size_reducer",
    "ShaftDesigner",
    "size_shaft",
]
