"""
Tests for ratio distribution.
"""

import math

import pytest

from helixcalc.physics.ratio import distribute_ratio


class TestDistributeRatio:
    """Tests for distribute_ratio."""

    def test_reference_scenario(self):
        """Test Ng=1000, Nc=100 with z1=20, z3=22."""
        dist = distribute_ratio(1000, 100, z1=20, z3=22)

        assert dist.target_ratio == pytest.approx(10.0)
        assert dist.stage1_theoretical == pytest.approx(math.sqrt(10))
        assert dist.z2 == 63
        assert dist.z4 == 70
        assert dist.total_ratio == pytest.approx(63 / 20 * 70 / 22)
        assert abs(dist.total_ratio - 10.0) / 10.0 < 0.03
        assert dist.error_pct > 0
        assert dist.error_pct == pytest.approx(0.227, abs=0.001)

    def test_total_is_product_of_stage_ratios(self):
        """Test the total ratio is exactly the product of integer-tooth ratios."""
        for ng, nc, z1, z3 in [(1450, 100, 20, 20), (2900, 37, 17, 23), (960, 150, 25, 19)]:
            dist = distribute_ratio(ng, nc, z1, z3)

            assert isinstance(dist.z2, int)
            assert isinstance(dist.z4, int)
            assert dist.stage1_ratio == dist.z2 / dist.z1
            assert dist.stage2_ratio == dist.z4 / dist.z3
            assert dist.total_ratio == dist.stage1_ratio * dist.stage2_ratio

    def test_intermediate_speed_uses_achieved_ratio(self):
        """Test N2 = Ng / achieved stage 1 ratio."""
        dist = distribute_ratio(1000, 100, z1=20, z3=22)

        assert dist.intermediate_speed_rpm == pytest.approx(1000 / (63 / 20))
        assert dist.actual_output_speed_rpm == pytest.approx(1000 / dist.total_ratio)
        assert dist.output_speed_rpm == 100

    def test_default_pinion_teeth(self):
        """Test pinion counts default to 20."""
        dist = distribute_ratio(1000, 100)

        assert dist.z1 == 20
        assert dist.z3 == 20

    def test_geometric_split(self):
        """Test theoretical stage ratios multiply to the target."""
        dist = distribute_ratio(1450, 58)

        assert dist.stage1_theoretical * dist.stage2_theoretical == pytest.approx(25.0)
        assert dist.stage1_theoretical == pytest.approx(dist.stage2_theoretical)

    def test_exact_ratio_has_zero_error(self):
        """Test a ratio reachable with whole teeth has no error."""
        dist = distribute_ratio(1600, 100, z1=20, z3=20)

        assert dist.z2 == 80
        assert dist.z4 == 80
        assert dist.error_pct == pytest.approx(0.0)
