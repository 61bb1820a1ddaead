"""
Shaft strength calculations.

The shaft is a simply supported beam with the gear between bearings A and
B. Vertical and horizontal planes are solved separately and combined.

ASSUMPTIONS:
- Gear forces act at a single point at distance L1 from bearing A
- The axial force acts at the pitch radius; its moment is carried by the
  radial reaction of bearing B
- Solid round shaft, static strength against yield (sigma_Ak / S)
"""

import math
from dataclasses import dataclass

from helixcalc.catalog.models import Keyway
from helixcalc.physics.constants import HUB_LENGTH_FACTOR, TORSION_WEIGHT


@dataclass
class SupportReactions:
    """Bearing reactions of a single-gear shaft (N)."""
    a_vertical_n: float
    b_vertical_n: float
    a_horizontal_n: float
    b_horizontal_n: float

    @property
    def a_resultant_n(self) -> float:
        """Total radial reaction at bearing A."""
        return math.hypot(self.a_vertical_n, self.a_horizontal_n)

    @property
    def b_resultant_n(self) -> float:
        """Total radial reaction at bearing B."""
        return math.hypot(self.b_vertical_n, self.b_horizontal_n)


def support_reactions(
    tangential_force_n: float,
    radial_force_n: float,
    axial_force_n: float,
    pitch_diameter_mm: float,
    span_a_mm: float,
    span_b_mm: float,
) -> SupportReactions:
    """
    Bearing reactions from moment balance.

    Args:
        tangential_force_n: Ft, horizontal plane
        radial_force_n: Fr, vertical plane
        axial_force_n: Fa at the pitch radius
        pitch_diameter_mm: Gear pitch diameter d
        span_a_mm: Gear to bearing A distance L1
        span_b_mm: Gear to bearing B distance L2

    Equations:
        L = L1 + L2, Ma = Fa d / 2
        RB_V = (Fr L1 + Ma) / L,  RA_V = Fr - RB_V
        RB_H = Ft L1 / L,         RA_H = Ft - RB_H
    """
    total_span = span_a_mm + span_b_mm
    axial_moment = axial_force_n * pitch_diameter_mm / 2

    b_vertical = (radial_force_n * span_a_mm + axial_moment) / total_span
    b_horizontal = tangential_force_n * span_a_mm / total_span

    return SupportReactions(
        a_vertical_n=radial_force_n - b_vertical,
        b_vertical_n=b_vertical,
        a_horizontal_n=tangential_force_n - b_horizontal,
        b_horizontal_n=b_horizontal,
    )


def bending_moment(reactions: SupportReactions, span_a_mm: float) -> float:
    """
    Resultant bending moment at the gear (N*mm).

    Equations:
        Mb = sqrt((RA_V L1)^2 + (RA_H L1)^2)
    """
    return math.hypot(reactions.a_vertical_n * span_a_mm, reactions.a_horizontal_n * span_a_mm)


def equivalent_moment(
    bending_moment_nmm: float,
    torque_nmm: float,
    fatigue_multiplier: float = 1.0,
) -> float:
    """
    Equivalent moment for combined bending and torsion (N*mm).

    Equations:
        Mv = sqrt((k Mb)^2 + 0.75 T^2)
    """
    return math.sqrt((fatigue_multiplier * bending_moment_nmm) ** 2 + TORSION_WEIGHT * torque_nmm ** 2)


def minimum_diameter(equivalent_moment_nmm: float, allowable_stress_mpa: float) -> float:
    """
    Minimum solid shaft diameter (mm).

    Equations:
        d = (32 Mv / (pi sigma_em))^(1/3)
    """
    return (32 * equivalent_moment_nmm / (math.pi * allowable_stress_mpa)) ** (1 / 3)


def section_modulus(diameter_mm: float) -> float:
    """Bending section modulus W = pi d^3 / 32 (mm^3)."""
    return math.pi * diameter_mm ** 3 / 32


def polar_section_modulus(diameter_mm: float) -> float:
    """Torsion section modulus Wp = pi d^3 / 16 (mm^3)."""
    return math.pi * diameter_mm ** 3 / 16


@dataclass
class KeyPressure:
    """Hub groove pressure of a parallel key."""
    hub_length_mm: float
    effective_length_mm: float
    force_n: float
    pressure_mpa: float
    allowable_pressure_mpa: float
    safety: float


def key_pressure(
    torque_nm: float,
    shaft_diameter_mm: float,
    keyway: Keyway,
    allowable_pressure_mpa: float,
    rounded_ends: bool = True,
) -> KeyPressure:
    """
    Crushing pressure on the hub side of a parallel key.

    Args:
        torque_nm: Transmitted torque
        shaft_diameter_mm: Shaft diameter at the key
        keyway: Key band
        allowable_pressure_mpa: Allowable pressure
        rounded_ends: Form A key; the rounded ends do not bear

    Equations:
        L_hub = 1.2 d, L_eff = L_hub - b (form A)
        F = 2000 T / d
        p = F / (L_eff t2)
        S = p_em / p
    """
    hub_length = HUB_LENGTH_FACTOR * shaft_diameter_mm
    effective_length = hub_length - keyway.width_mm if rounded_ends else hub_length
    force = 2000 * torque_nm / shaft_diameter_mm
    pressure = force / (effective_length * keyway.hub_depth_mm)
    safety = allowable_pressure_mpa / pressure

    return KeyPressure(
        hub_length_mm=hub_length,
        effective_length_mm=effective_length,
        force_n=force,
        pressure_mpa=pressure,
        allowable_pressure_mpa=allowable_pressure_mpa,
        safety=safety,
    )
