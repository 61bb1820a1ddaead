"""
Ratio distribution for a two-stage reducer.

Splits the total reduction geometrically over the two stages and rounds
the gear tooth counts to whole numbers. The rounding is the dominant
source of ratio error; the error is reported, never corrected.
"""

import math
from dataclasses import dataclass

from helixcalc.physics.tables import round_half_up


@dataclass
class RatioDistribution:
    """Result of ratio distribution."""
    target_ratio: float
    stage1_theoretical: float
    stage2_theoretical: float
    z1: int
    z2: int
    z3: int
    z4: int
    stage1_ratio: float          # z2 / z1
    stage2_ratio: float          # z4 / z3
    total_ratio: float           # stage1_ratio * stage2_ratio
    error_pct: float
    input_speed_rpm: float
    intermediate_speed_rpm: float  # Ng / stage1_ratio
    output_speed_rpm: float        # Nominal Nc
    actual_output_speed_rpm: float


def distribute_ratio(
    input_speed_rpm: float,
    output_speed_rpm: float,
    z1: int = 20,
    z3: int = 20,
) -> RatioDistribution:
    """
    Distribute a total speed ratio over two helical stages.

    Args:
        input_speed_rpm: Motor speed Ng
        output_speed_rpm: Required output speed Nc
        z1: Stage 1 pinion teeth
        z3: Stage 2 pinion teeth

    Returns:
        RatioDistribution with rounded tooth counts and achieved ratios

    Equations:
        i_total = Ng / Nc
        i12_th = sqrt(i_total),  i34_th = i_total / i12_th
        z2 = round(z1 * i12_th), z4 = round(z3 * i34_th)
        i12 = z2 / z1, i34 = z4 / z3, i = i12 * i34
        error = |i_total - i| / i_total * 100
        N2 = Ng / i12

    Design Guidelines:
        - Equal stage ratios keep the larger stage as small as possible
        - Errors below about 3% are normally acceptable for a reducer
    """
    target = input_speed_rpm / output_speed_rpm
    stage1_theoretical = math.sqrt(target)
    stage2_theoretical = target / stage1_theoretical

    z2 = round_half_up(z1 * stage1_theoretical)
    z4 = round_half_up(z3 * stage2_theoretical)

    stage1_ratio = z2 / z1
    stage2_ratio = z4 / z3
    total_ratio = stage1_ratio * stage2_ratio
    error_pct = abs(target - total_ratio) / target * 100

    intermediate_speed = input_speed_rpm / stage1_ratio

    return RatioDistribution(
        target_ratio=target,
        stage1_theoretical=stage1_theoretical,
        stage2_theoretical=stage2_theoretical,
        z1=z1,
        z2=z2,
        z3=z3,
        z4=z4,
        stage1_ratio=stage1_ratio,
        stage2_ratio=stage2_ratio,
        total_ratio=total_ratio,
        error_pct=error_pct,
        input_speed_rpm=input_speed_rpm,
        intermediate_speed_rpm=intermediate_speed,
        output_speed_rpm=output_speed_rpm,
        actual_output_speed_rpm=intermediate_speed / stage2_ratio,
    )
