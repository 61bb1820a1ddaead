"""
Calculation formulas for helical gear reducers.

This module provides the hand-calculation method for:
- Ratio distribution over two stages
- Helical gear module sizing, geometry, forces and stresses
- Rolling bearing rating life
- Shaft reactions, diameter and parallel key pressure

Functions here are plain formulas over floats; validation of input ranges
happens in the pydantic input models.
"""

from helixcalc.physics.units import ureg, Q_, torque_from_power, nm_to_nmm, nmm_to_nm, deg_to_rad
from helixcalc.physics.tables import (
    equivalent_tooth_count,
    form_factor,
    helix_angle_factor,
    select_standard_module,
    select_standard_shaft_diameter,
    select_keyway,
    shaft_extension_for,
    working_factor_for,
)
from helixcalc.physics.ratio import distribute_ratio, RatioDistribution
from helixcalc.physics.gears import (
    elastic_factor,
    ratio_factor,
    rolling_factor,
    transverse_contact_ratio,
    contact_ratio_factor,
    bending_module,
    surface_module,
    gear_geometry,
    mesh_forces,
    GearGeometry,
    MeshForces,
)
from helixcalc.physics.bearings import (
    load_factors,
    equivalent_dynamic_load,
    equivalent_static_load,
    basic_rating_life,
    rating_life_hours,
    required_dynamic_load,
    LoadFactors,
)
from helixcalc.physics.shaft import (
    support_reactions,
    bending_moment,
    equivalent_moment,
    minimum_diameter,
    key_pressure,
    SupportReactions,
    KeyPressure,
)

__all__ = [
    # Units
    "ureg",
    "Q_",
    "torque_from_power",
    "nm_to_nmm",
    "nmm_to_nm",
    # Tables
    "equivalent_tooth_count",
    "form_factor",
    "helix_angle_factor",
    "select_standard_module",
    "select_standard_shaft_diameter",
    "select_keyway",
    "shaft_extension_for",
    "working_factor_for",
    # Ratio
    "distribute_ratio",
    "RatioDistribution",
    # Gears
    "elastic_factor",
    "ratio_factor",
    "rolling_factor",
    "transverse_contact_ratio",
    "contact_ratio_factor",
    "bending_module",
    "surface_module",
    "gear_geometry",
    "mesh_forces",
    "GearGeometry",
    "MeshForces",
    # Bearings
    "load_factors",
    "equivalent_dynamic_load",
    "equivalent_static_load",
    "basic_rating_life",
    "rating_life_hours",
    "required_dynamic_load",
    "LoadFactors",
    # Shaft
    "support_reactions",
    "bending_moment",
    "equivalent_moment",
    "minimum_diameter",
    "key_pressure",
    "SupportReactions",
    "KeyPressure",
]
