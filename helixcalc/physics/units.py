"""
Unit registry and helpers for dimensional calculations.

Uses pint library to keep conversions between the engineering units of the
hand-calculation method (kW, rpm, N*m, N*mm, hours) explicit.
"""

import pint

from helixcalc.physics.constants import TORQUE_CONSTANT

# Create a shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return quantity.to(unit).magnitude


def torque_from_power(power_kw: float, speed_rpm: float) -> float:
    """
    Shaft torque in N*m from power and speed.

    Uses the rounded workshop constant 9550 (exact value 30000/pi).
    """
    return TORQUE_CONSTANT * power_kw / speed_rpm


def nm_to_nmm(torque_nm: float) -> float:
    """Convert a moment from N*m to N*mm."""
    return magnitude_in(Q_(torque_nm, "N*m"), "N*mm")


def nmm_to_nm(moment_nmm: float) -> float:
    """Convert a moment from N*mm to N*m."""
    return magnitude_in(Q_(moment_nmm, "N*mm"), "N*m")


def deg_to_rad(angle_deg: float) -> float:
    """Convert an angle from degrees to radians."""
    return magnitude_in(Q_(angle_deg, "degree"), "radian")


def life_hours_from_revolutions(million_revolutions: float, speed_rpm: float) -> float:
    """
    Convert a life in millions of revolutions to operating hours.

    L10h = L10 * 10^6 / (60 * n)
    """
    revolutions = Q_(million_revolutions * 1e6, "revolution")
    return magnitude_in(revolutions / Q_(speed_rpm, "rpm"), "hour")


def revolutions_from_life_hours(hours: float, speed_rpm: float) -> float:
    """Convert operating hours at a speed to millions of revolutions."""
    revolutions = Q_(hours, "hour") * Q_(speed_rpm, "rpm")
    return magnitude_in(revolutions, "revolution") / 1e6
