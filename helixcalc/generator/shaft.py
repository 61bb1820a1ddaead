"""
Shaft designer.

Sizes a shaft carrying one gear between two bearings and checks the
parallel key at the standard diameter.
"""

import logging

from helixcalc.models.inputs import KeywayStyle, ShaftInput
from helixcalc.models.outputs import (
    KeywayCheck,
    ShaftExtension,
    ShaftReactions,
    ShaftResult,
)
from helixcalc.physics.constants import MIN_KEY_SAFETY
from helixcalc.physics.shaft import (
    bending_moment,
    equivalent_moment,
    key_pressure,
    minimum_diameter,
    polar_section_modulus,
    section_modulus,
    support_reactions,
)
from helixcalc.physics.tables import (
    select_keyway,
    select_standard_shaft_diameter,
    shaft_extension_for,
)
from helixcalc.physics.units import nm_to_nmm, nmm_to_nm, torque_from_power

logger = logging.getLogger(__name__)


class ShaftDesigner:
    """Sizer for a simply supported single-gear shaft."""

    def __init__(self, inputs: ShaftInput):
        self.inputs = inputs
        self.material = inputs.get_material()
        self.torque_nm = torque_from_power(inputs.power_kw, inputs.speed_rpm)
        self.torque_nmm = nm_to_nmm(self.torque_nm)
        self.allowable_stress_mpa = self.material.yield_strength_mpa / inputs.safety_factor

    def design(self) -> ShaftResult:
        """
        Size the shaft.

        Returns:
            ShaftResult at the standard diameter
        """
        inputs = self.inputs
        warnings: list[str] = []

        reactions = support_reactions(
            inputs.tangential_force_n,
            inputs.radial_force_n,
            inputs.axial_force_n,
            inputs.gear_pitch_diameter_mm,
            inputs.span_a_mm,
            inputs.span_b_mm,
        )
        mb = bending_moment(reactions, inputs.span_a_mm)

        k = self._fatigue_multiplier(warnings)
        mv = equivalent_moment(mb, self.torque_nmm, k)

        d_min = minimum_diameter(mv, self.allowable_stress_mpa)
        d_std, within_series = select_standard_shaft_diameter(d_min)
        if not within_series:
            logger.warning(f"Minimum shaft diameter {d_min:.2f} mm exceeds the standard series")
            warnings.append(
                f"Minimum diameter {d_min:.2f} mm exceeds the largest standard diameter {d_std} mm"
            )
        logger.debug(f"Shaft: Mb={mb:.0f} N*mm Mv={mv:.0f} N*mm d_min={d_min:.2f} -> d={d_std}")

        # Stresses at the standard diameter
        w = section_modulus(d_std)
        sigma_b = mb / w
        tau = self.torque_nmm / polar_section_modulus(d_std)
        sigma_v = mv / w
        is_safe = sigma_b < self.allowable_stress_mpa
        if not is_safe:
            warnings.append(
                f"Bending stress {sigma_b:.1f} MPa reaches the allowable "
                f"{self.allowable_stress_mpa:.1f} MPa"
            )

        extension_d, extension_l = shaft_extension_for(d_std)
        keyway_check = self._check_keyway(d_std, warnings)

        return ShaftResult(
            torque_nm=self.torque_nm,
            reactions=ShaftReactions(
                a_vertical_n=reactions.a_vertical_n,
                b_vertical_n=reactions.b_vertical_n,
                a_horizontal_n=reactions.a_horizontal_n,
                b_horizontal_n=reactions.b_horizontal_n,
                a_resultant_n=reactions.a_resultant_n,
                b_resultant_n=reactions.b_resultant_n,
            ),
            bending_moment_nm=nmm_to_nm(mb),
            fatigue_multiplier=k,
            equivalent_moment_nm=nmm_to_nm(mv),
            allowable_stress_mpa=self.allowable_stress_mpa,
            minimum_diameter_mm=d_min,
            standard_diameter_mm=d_std,
            bending_stress_mpa=sigma_b,
            shear_stress_mpa=tau,
            equivalent_stress_mpa=sigma_v,
            is_safe=is_safe,
            extension=ShaftExtension(diameter_mm=extension_d, length_mm=extension_l),
            keyway_check=keyway_check,
            material=self.material.name,
            warnings=warnings,
        )

    def _fatigue_multiplier(self, warnings: list[str]) -> float:
        """k = sigma_K / sigma_D when fatigue correction is requested."""
        if not self.inputs.fatigue_correction:
            return 1.0
        if self.material.durability_limit_mpa > 0:
            return self.material.ultimate_strength_mpa / self.material.durability_limit_mpa
        warnings.append(
            f"Material {self.material.name} has no durability limit; fatigue correction skipped"
        )
        return 1.0

    def _check_keyway(self, diameter_mm: float, warnings: list[str]) -> KeywayCheck:
        """Hub pressure of the standard key at the given diameter."""
        keyway = select_keyway(diameter_mm)
        if not keyway.covers(diameter_mm):
            warnings.append(
                f"Shaft diameter {diameter_mm} mm is outside the keyway table; "
                f"using {keyway.width_mm} x {keyway.height_mm} key"
            )

        pressure = key_pressure(
            self.torque_nm,
            diameter_mm,
            keyway,
            self.allowable_stress_mpa,
            rounded_ends=self.inputs.keyway_style == KeywayStyle.A,
        )
        is_safe = pressure.safety >= MIN_KEY_SAFETY
        if not is_safe:
            warnings.append(
                f"Key pressure {pressure.pressure_mpa:.1f} MPa exceeds the allowable "
                f"{pressure.allowable_pressure_mpa:.1f} MPa"
            )

        return KeywayCheck(
            keyway=keyway,
            style=self.inputs.keyway_style.value,
            hub_length_mm=pressure.hub_length_mm,
            effective_length_mm=pressure.effective_length_mm,
            force_n=pressure.force_n,
            pressure_mpa=pressure.pressure_mpa,
            allowable_pressure_mpa=pressure.allowable_pressure_mpa,
            safety=pressure.safety,
            is_safe=is_safe,
        )


def size_shaft(inputs: ShaftInput) -> ShaftResult:
    """
    Size a shaft and its parallel key.

    Args:
        inputs: Validated shaft input

    Returns:
        ShaftResult
    """
    return ShaftDesigner(inputs).design()
