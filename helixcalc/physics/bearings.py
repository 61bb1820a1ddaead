"""
Rolling bearing life calculations (ISO 281 basic rating life).

ASSUMPTIONS:
- 90% reliability, standard materials and lubrication (a1 = a_ISO = 1)
- Constant load and speed
"""

import math
from dataclasses import dataclass

from helixcalc.catalog.models import BearingKind
from helixcalc.physics.constants import STATIC_AXIAL_FACTOR, STATIC_RADIAL_FACTOR
from helixcalc.physics.units import life_hours_from_revolutions, revolutions_from_life_hours


@dataclass
class LoadFactors:
    """Dynamic load factors X, Y and the axial limit e."""
    x: float
    y: float
    e: float


# Deep groove ball bearings: Fa/C0 threshold -> (e, Y), scanned from the top
DEEP_GROOVE_FACTORS: tuple[tuple[float, float, float], ...] = (
    (0.5, 0.56, 1.0),
    (0.25, 0.44, 1.0),
    (0.13, 0.37, 1.2),
    (0.07, 0.31, 1.4),
    (0.04, 0.27, 1.6),
    (0.025, 0.24, 1.8),
)
DEEP_GROOVE_DEFAULT = (0.22, 2.0)
DEEP_GROOVE_X = 0.56

# Fixed factors per kind: (e, X, Y) used when Fa/Fr > e
FIXED_FACTORS: dict[BearingKind, tuple[float, float, float]] = {
    BearingKind.SELF_ALIGNING_BALL: (0.3, 0.65, 2.5),
    BearingKind.ANGULAR_CONTACT_BALL: (0.68, 0.41, 0.87),
    BearingKind.TAPERED_ROLLER: (1.5, 0.67, 0.67),
    BearingKind.CYLINDRICAL_ROLLER: (0.0, 0.92, 0.6),
}


def load_ratio(radial_load_n: float, axial_load_n: float) -> float:
    """Fa / Fr; infinite for a purely axial load, 0 when both are zero."""
    if radial_load_n > 0:
        return axial_load_n / radial_load_n
    return math.inf if axial_load_n > 0 else 0.0


def load_factors(
    kind: BearingKind,
    radial_load_n: float,
    axial_load_n: float,
    static_load_n: float,
) -> LoadFactors:
    """
    Dynamic load factors X, Y for a bearing kind.

    Args:
        kind: Bearing construction
        radial_load_n: Radial load Fr
        axial_load_n: Effective axial load Fa
        static_load_n: Static load rating C0 (selects e for deep groove bearings)

    Returns:
        LoadFactors; X = 1, Y = 0 whenever Fa/Fr <= e

    Notes:
        For deep groove ball bearings e depends on the relative axial load
        Fa/C0 and Y follows from e; other kinds use fixed factors.
    """
    if kind == BearingKind.DEEP_GROOVE_BALL:
        relative_axial = axial_load_n / static_load_n
        e, y = DEEP_GROOVE_DEFAULT
        for threshold, e_row, y_row in DEEP_GROOVE_FACTORS:
            if relative_axial > threshold:
                e, y = e_row, y_row
                break
        x = DEEP_GROOVE_X
    else:
        e, x, y = FIXED_FACTORS[BearingKind(kind)]

    if load_ratio(radial_load_n, axial_load_n) <= e:
        return LoadFactors(x=1.0, y=0.0, e=e)
    return LoadFactors(x=x, y=y, e=e)


def equivalent_dynamic_load(
    radial_load_n: float,
    axial_load_n: float,
    factors: LoadFactors,
) -> float:
    """Equivalent dynamic load P = X Fr + Y Fa."""
    return factors.x * radial_load_n + factors.y * axial_load_n


def equivalent_static_load(radial_load_n: float, axial_load_n: float) -> float:
    """Equivalent static load P0 = max(0.6 Fr + 0.5 Fa, Fr)."""
    return max(
        STATIC_RADIAL_FACTOR * radial_load_n + STATIC_AXIAL_FACTOR * axial_load_n,
        radial_load_n,
    )


def basic_rating_life(dynamic_load_n: float, equivalent_load_n: float, exponent: float) -> float:
    """Basic rating life L10 = (C / P)^p in millions of revolutions."""
    return (dynamic_load_n / equivalent_load_n) ** exponent


def rating_life_hours(million_revolutions: float, speed_rpm: float) -> float:
    """Basic rating life in operating hours, L10h = L10 10^6 / (60 n)."""
    return life_hours_from_revolutions(million_revolutions, speed_rpm)


def required_dynamic_load(
    equivalent_load_n: float,
    speed_rpm: float,
    life_hours: float,
    exponent: float,
) -> float:
    """
    Dynamic load rating needed to reach a life in hours.

    Equations:
        C_req = P (60 n Lh / 10^6)^(1/p)
    """
    return equivalent_load_n * revolutions_from_life_hours(life_hours, speed_rpm) ** (1 / exponent)
