"""
Engineering constants shared by the sizing calculations.
"""

# P[kW] -> T[N*m] at n[rpm]: T = 9550 * P / n
TORQUE_CONSTANT = 9550.0

# Mesh efficiency of one helical stage
DEFAULT_MESH_EFFICIENCY = 0.95

# Achieved/target ratio deviation that triggers a warning (%)
DEFAULT_RATIO_TOLERANCE_PCT = 3.0

# Standard normal pressure angle (deg)
STANDARD_PRESSURE_ANGLE_DEG = 20.0

# Elasticity factor coefficient: Ke = 0.59 * sqrt(E_eq)
ELASTIC_FACTOR_COEFFICIENT = 0.59

# Tip and root diameter offsets in modules (zero-shifted teeth)
ADDENDUM_MODULES = 1.0
DEDENDUM_MODULES = 1.25

# Load direction factor on the bending durability limit
SINGLE_DIRECTION_LOAD_FACTOR = 1.0
REVERSING_LOAD_FACTOR = 0.7

# Torsion weighting in the equivalent moment: Mv = sqrt(Mb^2 + 0.75 T^2)
TORSION_WEIGHT = 0.75

# Bearing static safety limit S0 = C0 / P0
MIN_STATIC_SAFETY = 1.5

# Static equivalent load: P0 = max(X0 Fr + Y0 Fa, Fr)
STATIC_RADIAL_FACTOR = 0.6
STATIC_AXIAL_FACTOR = 0.5

# Hub length as a multiple of the shaft diameter
HUB_LENGTH_FACTOR = 1.2

# Key pressure safety below this is unsafe
MIN_KEY_SAFETY = 1.0
