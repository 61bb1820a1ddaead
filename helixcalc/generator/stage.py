"""
Helical gear stage sizer.

Sizes one gear pair: required module under the bending and surface
criteria, standard module selection, geometry, mesh forces and the safety
factors achieved by pinion and gear at the selected module.
"""

import logging

from helixcalc.models.inputs import ContactFactorModel, GearStageInput, LoadDirection
from helixcalc.models.outputs import (
    GearForces,
    GearStageResult,
    GoverningCriterion,
    StageFactors,
    StageGeometry,
    StageSafety,
    StageStresses,
)
from helixcalc.physics.constants import REVERSING_LOAD_FACTOR, SINGLE_DIRECTION_LOAD_FACTOR
from helixcalc.physics.gears import (
    allowable_bending_stress,
    bending_module,
    contact_pressure,
    contact_ratio_factor,
    elastic_factor,
    gear_geometry,
    mesh_forces,
    ratio_factor,
    rolling_factor,
    root_stress,
    surface_module,
    transverse_contact_ratio,
)
from helixcalc.physics.tables import (
    equivalent_tooth_count,
    form_factor,
    helix_angle_factor,
    round_half_up,
    select_standard_module,
)
from helixcalc.physics.units import nm_to_nmm, torque_from_power

logger = logging.getLogger(__name__)


class GearStageDesigner:
    """
    Sizer for a single helical gear pair.

    The required module is taken from the weaker member of the pair: the
    larger Kf / sigma_em for bending and the lower PhD for surface pressure.
    With the same material on both gears this is always the pinion.
    """

    def __init__(self, inputs: GearStageInput, name: str = "Stage"):
        """
        Initialize designer with stage inputs.

        Args:
            inputs: Stage operating point, geometry and material choices
            name: Label carried into the result and its warnings
        """
        self.inputs = inputs
        self.name = name

        self.pinion = inputs.get_pinion_material()
        self.gear = inputs.get_gear_material()

        self.torque_nm = torque_from_power(inputs.power_kw, inputs.speed_rpm)
        self.torque_nmm = nm_to_nmm(self.torque_nm)

        self.pinion_teeth = inputs.pinion_teeth
        self.gear_teeth = round_half_up(inputs.pinion_teeth * inputs.ratio)
        self.ratio_actual = self.gear_teeth / self.pinion_teeth

        if inputs.load_direction == LoadDirection.REVERSING:
            self.load_direction_factor = REVERSING_LOAD_FACTOR
        else:
            self.load_direction_factor = SINGLE_DIRECTION_LOAD_FACTOR

    def design(self) -> GearStageResult:
        """
        Size the stage.

        Returns:
            GearStageResult evaluated at the selected module
        """
        inputs = self.inputs
        warnings: list[str] = []

        factors = self._calculate_factors()
        contact_product = self._contact_product(factors)

        # Allowables per member
        sigma_em_pinion = allowable_bending_stress(
            self.pinion.durability_limit_mpa,
            inputs.bending_safety,
            self.load_direction_factor,
            inputs.notch_factor,
        )
        sigma_em_gear = allowable_bending_stress(
            self.gear.durability_limit_mpa,
            inputs.bending_safety,
            self.load_direction_factor,
            inputs.notch_factor,
        )
        p_em = min(self.pinion.surface_pressure_mpa, self.gear.surface_pressure_mpa) / inputs.surface_safety

        # Bending is sized on the member with the higher Kf / sigma_em
        if factors.form_factor_gear / sigma_em_gear > factors.form_factor_pinion / sigma_em_pinion:
            sizing_form_factor, sizing_sigma_em = factors.form_factor_gear, sigma_em_gear
        else:
            sizing_form_factor, sizing_sigma_em = factors.form_factor_pinion, sigma_em_pinion

        m_bending = bending_module(
            self.torque_nmm,
            self.pinion_teeth,
            inputs.helix_angle_deg,
            sizing_form_factor,
            factors.working_factor,
            factors.dynamic_factor,
            inputs.width_factor,
            sizing_sigma_em,
        )
        m_surface = surface_module(
            self.torque_nmm,
            self.pinion_teeth,
            inputs.helix_angle_deg,
            contact_product,
            factors.working_factor,
            factors.dynamic_factor,
            inputs.width_factor,
            p_em,
        )

        if m_bending >= m_surface:
            theoretical, criterion = m_bending, GoverningCriterion.BENDING
        else:
            theoretical, criterion = m_surface, GoverningCriterion.SURFACE_PRESSURE

        module, overridden = self._select_module(theoretical, warnings)
        logger.debug(
            f"{self.name}: Mnm={m_bending:.3f} Mny={m_surface:.3f} -> "
            f"m={module} ({criterion.value}{', override' if overridden else ''})"
        )

        geometry = gear_geometry(
            module,
            self.pinion_teeth,
            self.gear_teeth,
            inputs.helix_angle_deg,
            inputs.width_factor,
        )
        forces = mesh_forces(
            self.torque_nm,
            geometry.pitch_diameter_pinion_mm,
            inputs.pressure_angle_deg,
            inputs.helix_angle_deg,
        )

        # Stresses at the selected module
        sigma_pinion = root_stress(
            forces.tangential_n,
            factors.form_factor_pinion,
            factors.working_factor,
            factors.dynamic_factor,
            geometry.face_width_mm,
            module,
        )
        sigma_gear = root_stress(
            forces.tangential_n,
            factors.form_factor_gear,
            factors.working_factor,
            factors.dynamic_factor,
            geometry.face_width_mm,
            module,
        )
        pressure = contact_pressure(
            forces.tangential_n,
            geometry.face_width_mm,
            geometry.pitch_diameter_pinion_mm,
            contact_product,
            factors.working_factor,
            factors.dynamic_factor,
        )

        safety = self._calculate_safety(sigma_pinion, sigma_gear, pressure)
        if not safety.bending_ok:
            warnings.append(
                f"{self.name}: bending safety {min(safety.bending_pinion, safety.bending_gear):.2f} "
                f"below required {safety.required_bending:.2f}"
            )
        if not safety.surface_ok:
            warnings.append(
                f"{self.name}: surface safety {min(safety.surface_pinion, safety.surface_gear):.2f} "
                f"below required {safety.required_surface:.2f}"
            )
        for warning in warnings:
            logger.warning(warning)

        return GearStageResult(
            name=self.name,
            power_kw=inputs.power_kw,
            speed_rpm=inputs.speed_rpm,
            output_speed_rpm=inputs.speed_rpm / self.ratio_actual,
            ratio_target=inputs.ratio,
            ratio_actual=self.ratio_actual,
            torque_nm=self.torque_nm,
            helix_angle_deg=inputs.helix_angle_deg,
            pressure_angle_deg=inputs.pressure_angle_deg,
            bending_module_mm=m_bending,
            surface_module_mm=m_surface,
            theoretical_module_mm=theoretical,
            governing_criterion=criterion,
            module_overridden=overridden,
            geometry=StageGeometry(
                module_mm=geometry.module_mm,
                pinion_teeth=self.pinion_teeth,
                gear_teeth=self.gear_teeth,
                pitch_diameter_pinion_mm=geometry.pitch_diameter_pinion_mm,
                pitch_diameter_gear_mm=geometry.pitch_diameter_gear_mm,
                tip_diameter_pinion_mm=geometry.tip_diameter_pinion_mm,
                tip_diameter_gear_mm=geometry.tip_diameter_gear_mm,
                root_diameter_pinion_mm=geometry.root_diameter_pinion_mm,
                root_diameter_gear_mm=geometry.root_diameter_gear_mm,
                center_distance_mm=geometry.center_distance_mm,
                face_width_mm=geometry.face_width_mm,
            ),
            pinion_forces=GearForces(
                tangential_n=forces.tangential_n,
                radial_n=forces.radial_n,
                axial_n=forces.axial_n,
                pitch_diameter_mm=geometry.pitch_diameter_pinion_mm,
            ),
            gear_forces=GearForces(
                tangential_n=forces.tangential_n,
                radial_n=forces.radial_n,
                axial_n=forces.axial_n,
                pitch_diameter_mm=geometry.pitch_diameter_gear_mm,
            ),
            factors=factors,
            stresses=StageStresses(
                root_stress_pinion_mpa=sigma_pinion,
                root_stress_gear_mpa=sigma_gear,
                allowable_root_stress_pinion_mpa=sigma_em_pinion,
                allowable_root_stress_gear_mpa=sigma_em_gear,
                contact_pressure_mpa=pressure,
                allowable_pressure_pinion_mpa=self.pinion.surface_pressure_mpa / inputs.surface_safety,
                allowable_pressure_gear_mpa=self.gear.surface_pressure_mpa / inputs.surface_safety,
            ),
            safety=safety,
            pinion_material=self.pinion.name,
            gear_material=self.gear.name,
            warnings=warnings,
        )

    def _calculate_factors(self) -> StageFactors:
        """Look up and compute the empirical factors of the pair."""
        inputs = self.inputs
        beta = inputs.helix_angle_deg

        eps = transverse_contact_ratio(
            self.pinion_teeth, self.gear_teeth, beta, inputs.pressure_angle_deg
        )
        if inputs.contact_factor_model == ContactFactorModel.LEGACY:
            k_eps = 1.0
        else:
            k_eps = contact_ratio_factor(eps)

        return StageFactors(
            form_factor_pinion=form_factor(equivalent_tooth_count(self.pinion_teeth, beta)),
            form_factor_gear=form_factor(equivalent_tooth_count(self.gear_teeth, beta)),
            helix_factor=helix_angle_factor(beta),
            elastic_factor=elastic_factor(
                self.pinion.elastic_modulus_mpa, self.gear.elastic_modulus_mpa
            ),
            ratio_factor=ratio_factor(self.ratio_actual),
            rolling_factor=rolling_factor(inputs.pressure_angle_deg),
            contact_ratio=eps,
            contact_ratio_factor=k_eps,
            working_factor=inputs.working_factor,
            dynamic_factor=inputs.dynamic_factor,
        )

    @staticmethod
    def _contact_product(factors: StageFactors) -> float:
        """Ke * Kalpha * Keps * Kb * Ki."""
        return (
            factors.elastic_factor
            * factors.rolling_factor
            * factors.contact_ratio_factor
            * factors.helix_factor
            * factors.ratio_factor
        )

    def _select_module(self, theoretical: float, warnings: list[str]) -> tuple[float, bool]:
        """Standard module >= theoretical, or the caller's override."""
        override = self.inputs.module_override_mm
        if override is not None:
            if override < theoretical:
                warnings.append(
                    f"{self.name}: module override {override} mm is below the "
                    f"required {theoretical:.3f} mm"
                )
            return override, True

        module, within_series = select_standard_module(theoretical)
        if not within_series:
            warnings.append(
                f"{self.name}: required module {theoretical:.3f} mm exceeds the largest "
                f"standard module {module} mm"
            )
        return module, False

    def _calculate_safety(
        self,
        sigma_pinion: float,
        sigma_gear: float,
        pressure: float,
    ) -> StageSafety:
        """Achieved safeties of pinion and gear against their own materials."""
        inputs = self.inputs
        k_dir = self.load_direction_factor

        bending_pinion = self.pinion.durability_limit_mpa * k_dir / (inputs.notch_factor * sigma_pinion)
        bending_gear = self.gear.durability_limit_mpa * k_dir / (inputs.notch_factor * sigma_gear)
        surface_pinion = self.pinion.surface_pressure_mpa / pressure
        surface_gear = self.gear.surface_pressure_mpa / pressure

        return StageSafety(
            bending_pinion=bending_pinion,
            bending_gear=bending_gear,
            surface_pinion=surface_pinion,
            surface_gear=surface_gear,
            required_bending=inputs.bending_safety,
            required_surface=inputs.surface_safety,
            bending_ok=min(bending_pinion, bending_gear) >= inputs.bending_safety,
            surface_ok=min(surface_pinion, surface_gear) >= inputs.surface_safety,
        )


def size_gear_stage(inputs: GearStageInput, name: str = "Stage") -> GearStageResult:
    """
    Size one helical gear stage.

    Args:
        inputs: Validated stage input
        name: Stage label

    Returns:
        GearStageResult at the selected module
    """
    return GearStageDesigner(inputs, name=name).design()
