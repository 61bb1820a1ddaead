"""
Table lookups for the sizing method.

Interpolation tables (form factor, helix angle factor), standard-series
selection (modules, shaft diameters), keyway bands, shaft extension stubs
and the working factor matrix.

ASSUMPTIONS:
- Tables are strictly ascending on their independent variable
- Values beyond the end of a standard series are clamped to the largest
  entry; callers report that as a warning
"""

import math
from typing import Sequence

from helixcalc.catalog.data import (
    FORM_FACTOR_ASYMPTOTE,
    FORM_FACTOR_ASYMPTOTE_TEETH,
    FORM_FACTOR_TABLE,
    HELIX_ANGLE_ASYMPTOTE_DEG,
    HELIX_ANGLE_FACTOR_ASYMPTOTE,
    HELIX_ANGLE_FACTOR_TABLE,
    SHAFT_EXTENSION_FALLBACK_LENGTH_MM,
    SHAFT_EXTENSIONS,
    STANDARD_KEYWAYS,
    STANDARD_MODULES,
    STANDARD_SHAFT_DIAMETERS,
)
from helixcalc.catalog.models import DrivenLoad, Keyway, PrimeMover
from helixcalc.physics.units import deg_to_rad


# Application factor Ko: prime mover x driven load
WORKING_FACTORS: dict[PrimeMover, dict[DrivenLoad, float]] = {
    PrimeMover.ELECTRIC_MOTOR: {
        DrivenLoad.UNIFORM: 1.00,
        DrivenLoad.MODERATE_SHOCK: 1.25,
        DrivenLoad.HEAVY_SHOCK: 1.50,
    },
    PrimeMover.MULTI_CYLINDER_ENGINE: {
        DrivenLoad.UNIFORM: 1.25,
        DrivenLoad.MODERATE_SHOCK: 1.50,
        DrivenLoad.HEAVY_SHOCK: 1.75,
    },
    PrimeMover.SINGLE_CYLINDER_ENGINE: {
        DrivenLoad.UNIFORM: 1.75,
        DrivenLoad.MODERATE_SHOCK: 2.00,
        DrivenLoad.HEAVY_SHOCK: 2.25,
    },
}


def interpolate(table: Sequence[tuple[float, float]], x: float) -> float:
    """
    Piecewise linear interpolation in an ascending (x, y) table.

    Values outside the table are clamped to the first or last y value.
    """
    if x <= table[0][0]:
        return table[0][1]
    for (x0, y0), (x1, y1) in zip(table, table[1:]):
        if x <= x1:
            return y0 + (y1 - y0) * (x - x0) / (x1 - x0)
    return table[-1][1]


def equivalent_tooth_count(teeth: int, helix_angle_deg: float) -> float:
    """
    Virtual spur gear tooth count of a helical gear.

    Equations:
        z_eq = z / cos^3(beta)
    """
    return teeth / math.cos(deg_to_rad(helix_angle_deg)) ** 3


def form_factor(equivalent_teeth: float) -> float:
    """
    Tooth form factor Kf for zero-shifted teeth.

    Args:
        equivalent_teeth: Equivalent tooth count z / cos^3(beta)

    Returns:
        Kf; 3.70 below 12 teeth, 2.20 at or above 100 teeth,
        linearly interpolated in between

    Raises:
        ValueError: For a negative tooth count
    """
    if equivalent_teeth < 0:
        raise ValueError("Equivalent tooth count must be non-negative")
    if equivalent_teeth >= FORM_FACTOR_ASYMPTOTE_TEETH:
        return FORM_FACTOR_ASYMPTOTE
    return interpolate(FORM_FACTOR_TABLE, equivalent_teeth)


def helix_angle_factor(helix_angle_deg: float) -> float:
    """
    Helix angle factor Kb for the surface pressure criterion.

    Returns 0.855 at or above 35 deg, linearly interpolated below.

    Raises:
        ValueError: For a negative helix angle
    """
    if helix_angle_deg < 0:
        raise ValueError("Helix angle must be non-negative")
    if helix_angle_deg >= HELIX_ANGLE_ASYMPTOTE_DEG:
        return HELIX_ANGLE_FACTOR_ASYMPTOTE
    return interpolate(HELIX_ANGLE_FACTOR_TABLE, helix_angle_deg)


def _select_from_series(series: Sequence[float], required: float) -> tuple[float, bool]:
    for value in series:
        if value >= required:
            return float(value), True
    return float(series[-1]), False


def select_standard_module(theoretical_module_mm: float) -> tuple[float, bool]:
    """
    Smallest standard module not below the theoretical module.

    Returns:
        Tuple of (module, within_series). When the requirement exceeds the
        series, the largest module is returned with within_series False.
    """
    return _select_from_series(STANDARD_MODULES, theoretical_module_mm)


def select_standard_shaft_diameter(minimum_diameter_mm: float) -> tuple[float, bool]:
    """
    Smallest standard shaft diameter not below the minimum diameter.

    Returns:
        Tuple of (diameter, within_series), as for select_standard_module
    """
    return _select_from_series(STANDARD_SHAFT_DIAMETERS, minimum_diameter_mm)


def select_keyway(shaft_diameter_mm: float) -> Keyway:
    """
    DIN 6885 key band for a shaft diameter (d_min < d <= d_max).

    Diameters outside the table fall back to the largest band.
    """
    for keyway in STANDARD_KEYWAYS:
        if keyway.covers(shaft_diameter_mm):
            return keyway
    return STANDARD_KEYWAYS[-1]


def shaft_extension_for(shaft_diameter_mm: float) -> tuple[float, float]:
    """
    Standard cylindrical shaft end for a seat diameter.

    Returns:
        Tuple of (extension diameter dc, extension length lc) in mm. Beyond
        the table the seat diameter is kept with a 350 mm extension.
    """
    for limit, dc, lc in SHAFT_EXTENSIONS:
        if shaft_diameter_mm <= limit:
            return float(dc), float(lc)
    return float(shaft_diameter_mm), SHAFT_EXTENSION_FALLBACK_LENGTH_MM


def working_factor_for(prime_mover: PrimeMover, driven_load: DrivenLoad) -> float:
    """Application factor Ko for a prime mover and driven load."""
    return WORKING_FACTORS[PrimeMover(prime_mover)][DrivenLoad(driven_load)]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values."""
    return int(math.floor(value + 0.5))
