"""
Helical gear strength calculations.

Module sizing under the tooth root bending criterion and the flank surface
pressure criterion, gear geometry, mesh forces and stresses at a selected
module.

ASSUMPTIONS:
- Zero-shifted (x = 0) involute teeth, addendum 1.0 m, dedendum 1.25 m
- Torque is constant (no load spectrum); shock is covered by Ko and Kv
- Torque T in N*mm, stresses in MPa, lengths in mm unless noted
"""

import math
from dataclasses import dataclass

from helixcalc.physics.constants import (
    ADDENDUM_MODULES,
    DEDENDUM_MODULES,
    ELASTIC_FACTOR_COEFFICIENT,
)
from helixcalc.physics.units import deg_to_rad


def elastic_factor(e_pinion_mpa: float, e_gear_mpa: float) -> float:
    """
    Material (elasticity) factor Ke.

    Equations:
        E_eq = 2 E1 E2 / (E1 + E2)
        Ke = 0.59 * sqrt(E_eq)

    For a steel pair (E = 211000 MPa) Ke is about 271.
    """
    e_eq = 2 * e_pinion_mpa * e_gear_mpa / (e_pinion_mpa + e_gear_mpa)
    return ELASTIC_FACTOR_COEFFICIENT * math.sqrt(e_eq)


def ratio_factor(ratio: float) -> float:
    """Ratio factor Ki = sqrt((u + 1) / u)."""
    return math.sqrt((ratio + 1) / ratio)


def rolling_factor(pressure_angle_deg: float) -> float:
    """
    Rolling (pitch point) factor Kalpha.

    Equations:
        Kalpha = 1 / sqrt(sin(alpha) cos(alpha))

    Equals 1.76 for the standard 20 deg pressure angle.
    """
    alpha = deg_to_rad(pressure_angle_deg)
    return 1 / math.sqrt(math.sin(alpha) * math.cos(alpha))


def transverse_contact_ratio(
    z1: int,
    z2: int,
    helix_angle_deg: float,
    pressure_angle_deg: float,
) -> float:
    """
    Transverse contact ratio of a zero-shifted helical pair.

    All diameters scale with the module, so the ratio is computed at m = 1
    and holds for any module.

    Equations:
        alpha_t = atan(tan(alpha_n) / cos(beta))
        d = z / cos(beta), da = d + 2, db = d cos(alpha_t)
        eps = [sqrt(ra1^2 - rb1^2) + sqrt(ra2^2 - rb2^2) - a sin(alpha_t)]
              / (pi cos(alpha_t) / cos(beta))
    """
    beta = deg_to_rad(helix_angle_deg)
    alpha_t = math.atan(math.tan(deg_to_rad(pressure_angle_deg)) / math.cos(beta))
    d1 = z1 / math.cos(beta)
    d2 = z2 / math.cos(beta)
    ra1, ra2 = d1 / 2 + ADDENDUM_MODULES, d2 / 2 + ADDENDUM_MODULES
    rb1, rb2 = d1 / 2 * math.cos(alpha_t), d2 / 2 * math.cos(alpha_t)
    center_distance = (d1 + d2) / 2
    path_of_contact = (
        math.sqrt(ra1 ** 2 - rb1 ** 2)
        + math.sqrt(ra2 ** 2 - rb2 ** 2)
        - center_distance * math.sin(alpha_t)
    )
    transverse_base_pitch = math.pi * math.cos(alpha_t) / math.cos(beta)
    return path_of_contact / transverse_base_pitch


def contact_ratio_factor(contact_ratio: float) -> float:
    """Contact ratio factor Keps = sqrt((4 - eps) / 3)."""
    return math.sqrt((4 - contact_ratio) / 3)


def allowable_bending_stress(
    durability_limit_mpa: float,
    safety: float,
    load_direction_factor: float = 1.0,
    notch_factor: float = 1.0,
) -> float:
    """
    Allowable tooth root stress.

    Equations:
        sigma_em = sigma_D * K_dir / (S * K_notch)

    Design Guidelines:
        - K_dir = 1.0 for single-direction load, 0.7 for reversing load
    """
    return durability_limit_mpa * load_direction_factor / (safety * notch_factor)


def bending_module(
    torque_nmm: float,
    pinion_teeth: int,
    helix_angle_deg: float,
    form_factor_value: float,
    working_factor: float,
    dynamic_factor: float,
    width_factor: float,
    allowable_stress_mpa: float,
) -> float:
    """
    Normal module required by the tooth root bending criterion.

    Equations:
        Mnm = [2 T cos^2(beta) Kf Ko Kv / (z1^2 psi_d sigma_em)]^(1/3)
    """
    cos_beta = math.cos(deg_to_rad(helix_angle_deg))
    term = (
        2 * torque_nmm * cos_beta ** 2 * form_factor_value * working_factor * dynamic_factor
    ) / (pinion_teeth ** 2 * width_factor * allowable_stress_mpa)
    return term ** (1 / 3)


def surface_module(
    torque_nmm: float,
    pinion_teeth: int,
    helix_angle_deg: float,
    contact_product: float,
    working_factor: float,
    dynamic_factor: float,
    width_factor: float,
    allowable_pressure_mpa: float,
) -> float:
    """
    Normal module required by the surface pressure criterion.

    Args:
        contact_product: Ke * Kalpha * Keps * Kb * Ki

    Equations:
        Mny = (cos(beta) / z1) * [2 T (Ke Kalpha Keps Kb Ki)^2 Ko Kv / (psi_d p_em^2)]^(1/3)
    """
    cos_beta = math.cos(deg_to_rad(helix_angle_deg))
    term = (
        2 * torque_nmm * contact_product ** 2 * working_factor * dynamic_factor
    ) / (width_factor * allowable_pressure_mpa ** 2)
    return cos_beta / pinion_teeth * term ** (1 / 3)


@dataclass
class GearGeometry:
    """Geometry of a helical gear pair at one module."""
    module_mm: float
    pitch_diameter_pinion_mm: float
    pitch_diameter_gear_mm: float
    tip_diameter_pinion_mm: float
    tip_diameter_gear_mm: float
    root_diameter_pinion_mm: float
    root_diameter_gear_mm: float
    center_distance_mm: float
    face_width_mm: float


def gear_geometry(
    module_mm: float,
    pinion_teeth: int,
    gear_teeth: int,
    helix_angle_deg: float,
    width_factor: float,
) -> GearGeometry:
    """
    Gear pair geometry.

    Equations:
        d = m z / cos(beta)
        da = d + 2 m, df = d - 2.5 m
        a = (d1 + d2) / 2
        b = psi_d d1
    """
    cos_beta = math.cos(deg_to_rad(helix_angle_deg))
    d1 = module_mm * pinion_teeth / cos_beta
    d2 = module_mm * gear_teeth / cos_beta
    return GearGeometry(
        module_mm=module_mm,
        pitch_diameter_pinion_mm=d1,
        pitch_diameter_gear_mm=d2,
        tip_diameter_pinion_mm=d1 + 2 * ADDENDUM_MODULES * module_mm,
        tip_diameter_gear_mm=d2 + 2 * ADDENDUM_MODULES * module_mm,
        root_diameter_pinion_mm=d1 - 2 * DEDENDUM_MODULES * module_mm,
        root_diameter_gear_mm=d2 - 2 * DEDENDUM_MODULES * module_mm,
        center_distance_mm=(d1 + d2) / 2,
        face_width_mm=width_factor * d1,
    )


@dataclass
class MeshForces:
    """Tooth forces of a helical mesh (N)."""
    tangential_n: float
    radial_n: float
    axial_n: float


def mesh_forces(
    torque_nm: float,
    pitch_diameter_mm: float,
    pressure_angle_deg: float,
    helix_angle_deg: float,
) -> MeshForces:
    """
    Mesh forces from torque at a pitch diameter.

    Equations:
        Ft = 2000 T / d
        Fr = Ft tan(alpha_n) / cos(beta)
        Fa = Ft tan(beta)
    """
    beta = deg_to_rad(helix_angle_deg)
    ft = 2000 * torque_nm / pitch_diameter_mm
    return MeshForces(
        tangential_n=ft,
        radial_n=ft * math.tan(deg_to_rad(pressure_angle_deg)) / math.cos(beta),
        axial_n=ft * math.tan(beta),
    )


def root_stress(
    tangential_force_n: float,
    form_factor_value: float,
    working_factor: float,
    dynamic_factor: float,
    face_width_mm: float,
    module_mm: float,
) -> float:
    """
    Tooth root bending stress.

    Equations:
        sigma = Ft Kf Ko Kv / (b m)
    """
    return (
        tangential_force_n * form_factor_value * working_factor * dynamic_factor
        / (face_width_mm * module_mm)
    )


def contact_pressure(
    tangential_force_n: float,
    face_width_mm: float,
    pinion_pitch_diameter_mm: float,
    contact_product: float,
    working_factor: float,
    dynamic_factor: float,
) -> float:
    """
    Flank (Hertzian) surface pressure.

    Equations:
        p = Ke Kalpha Keps Kb Ki sqrt(Ko Kv Ft / (b d1))
    """
    return contact_product * math.sqrt(
        working_factor * dynamic_factor * tangential_force_n
        / (face_width_mm * pinion_pitch_diameter_mm)
    )
