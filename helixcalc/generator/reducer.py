"""
Two-stage reducer designer.

Distributes the total ratio, then sizes both stages. Only power and speed
couple the stages; stage 2 runs at the achieved intermediate speed with the
power left after one mesh.
"""

import logging

from helixcalc.generator.stage import size_gear_stage
from helixcalc.models.inputs import ReducerInput
from helixcalc.models.outputs import (
    RatioAnalysis,
    ReducerResult,
    SpeedCascade,
    ToothCounts,
)
from helixcalc.physics.ratio import distribute_ratio
from helixcalc.physics.units import torque_from_power

logger = logging.getLogger(__name__)


class ReducerDesigner:
    """
    Designer for a two-stage helical reducer.

    Runs the ratio distribution once and the stage sizer twice.
    """

    def __init__(self, inputs: ReducerInput):
        """
        Initialize designer with reducer inputs.

        Args:
            inputs: Reducer operating point and per-stage settings
        """
        self.inputs = inputs
        self.distribution = distribute_ratio(
            inputs.input_speed_rpm,
            inputs.output_speed_rpm,
            inputs.pinion_teeth_stage1,
            inputs.pinion_teeth_stage2,
        )

        # Power after each mesh
        self.stage2_power_kw = inputs.power_kw * inputs.efficiency
        self.output_power_kw = self.stage2_power_kw * inputs.efficiency

    def design(self) -> ReducerResult:
        """
        Size the complete reducer.

        Returns:
            ReducerResult with both stages, ratio analysis and speed cascade
        """
        inputs = self.inputs
        dist = self.distribution

        logger.debug(
            f"{inputs.name}: i={dist.target_ratio:.4f} -> z {dist.z1}/{dist.z2}, "
            f"{dist.z3}/{dist.z4}, error {dist.error_pct:.3f}%"
        )

        stage1 = size_gear_stage(
            inputs.stage_input(
                inputs.stage1,
                power_kw=inputs.power_kw,
                speed_rpm=inputs.input_speed_rpm,
                ratio=dist.stage1_ratio,
                pinion_teeth=dist.z1,
            ),
            name="Stage 1",
        )
        stage2 = size_gear_stage(
            inputs.stage_input(
                inputs.stage2,
                power_kw=self.stage2_power_kw,
                speed_rpm=dist.intermediate_speed_rpm,
                ratio=dist.stage2_ratio,
                pinion_teeth=dist.z3,
            ),
            name="Stage 2",
        )

        ratio_warnings = self._ratio_warnings()
        for warning in ratio_warnings:
            logger.warning(warning)
        warnings = ratio_warnings + stage1.warnings + stage2.warnings

        return ReducerResult(
            name=inputs.name,
            stage1=stage1,
            stage2=stage2,
            ratio_analysis=RatioAnalysis(
                target_ratio=dist.target_ratio,
                stage1_theoretical=dist.stage1_theoretical,
                stage2_theoretical=dist.stage2_theoretical,
                stage1_ratio=dist.stage1_ratio,
                stage2_ratio=dist.stage2_ratio,
                actual_ratio=dist.total_ratio,
                error_pct=dist.error_pct,
            ),
            speeds=SpeedCascade(
                input_rpm=dist.input_speed_rpm,
                intermediate_rpm=dist.intermediate_speed_rpm,
                output_nominal_rpm=dist.output_speed_rpm,
                output_actual_rpm=dist.actual_output_speed_rpm,
            ),
            tooth_counts=ToothCounts(z1=dist.z1, z2=dist.z2, z3=dist.z3, z4=dist.z4),
            total_ratio_actual=dist.total_ratio,
            input_power_kw=inputs.power_kw,
            output_power_kw=self.output_power_kw,
            output_torque_nm=torque_from_power(self.output_power_kw, inputs.output_speed_rpm),
            warnings=warnings,
        )

    def _ratio_warnings(self) -> list[str]:
        """Warn when the achieved ratio strays beyond the tolerance."""
        dist = self.distribution
        tolerance = self.inputs.ratio_tolerance_pct
        if dist.error_pct > tolerance:
            return [
                f"Ratio error {dist.error_pct:.2f}% exceeds {tolerance:.2f}% "
                f"(target {dist.target_ratio:.4f}, achieved {dist.total_ratio:.4f})"
            ]
        return []


def size_reducer(inputs: ReducerInput) -> ReducerResult:
    """
    Size a two-stage helical reducer.

    Args:
        inputs: Validated reducer input

    Returns:
        ReducerResult
    """
    return ReducerDesigner(inputs).design()
