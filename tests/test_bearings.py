"""
Tests for bearing life physics, selection and catalog loading.
"""

import json
import logging

import pytest

from helixcalc.catalog.data import BEARING_CATALOG, find_bearing
from helixcalc.catalog.loader import dump_bearing_catalog, load_bearing_catalog
from helixcalc.catalog.matcher import (
    evaluate_bearing,
    search_candidates,
    select_bearing,
)
from helixcalc.catalog.models import BearingKind
from helixcalc.errors import (
    BearingSelectionError,
    MissingBearingError,
    NoBearingCandidateError,
)
from helixcalc.models.inputs import BearingInput, BearingMounting
from helixcalc.models.outputs import SelectionMode
from helixcalc.physics.bearings import (
    equivalent_static_load,
    load_factors,
    load_ratio,
    required_dynamic_load,
)


class TestBearingPhysics:
    """Tests for load factors and life equations."""

    def test_pure_radial_load(self):
        """Test X = 1, Y = 0 without axial load."""
        factors = load_factors(BearingKind.DEEP_GROOVE_BALL, 4800, 0, 7800)
        assert (factors.x, factors.y) == (1.0, 0.0)

    def test_deep_groove_small_axial_load(self):
        """Test Fa/Fr below e keeps X = 1, Y = 0."""
        factors = load_factors(BearingKind.DEEP_GROOVE_BALL, 4800, 1000, 7800)

        assert factors.e == pytest.approx(0.31)
        assert (factors.x, factors.y) == (1.0, 0.0)

    def test_deep_groove_large_axial_load(self):
        """Test e and Y follow Fa/C0 when Fa/Fr exceeds e."""
        factors = load_factors(BearingKind.DEEP_GROOVE_BALL, 4800, 2400, 7800)

        assert factors.e == pytest.approx(0.44)
        assert factors.x == pytest.approx(0.56)
        assert factors.y == pytest.approx(1.0)

    def test_angular_contact_factors(self):
        """Test fixed factors for angular contact bearings."""
        factors = load_factors(BearingKind.ANGULAR_CONTACT_BALL, 1000, 1000, 8800)

        assert factors.x == pytest.approx(0.41)
        assert factors.y == pytest.approx(0.87)

    def test_load_ratio_edge_cases(self):
        """Test Fa/Fr for zero radial load."""
        assert load_ratio(0, 100) == float("inf")
        assert load_ratio(0, 0) == 0.0

    def test_equivalent_static_load(self):
        """Test P0 is never below Fr."""
        assert equivalent_static_load(4800, 0) == pytest.approx(4800)
        assert equivalent_static_load(1000, 2000) == pytest.approx(1600)

    def test_required_dynamic_load_roundtrip(self):
        """Test C_req gives exactly the desired life."""
        c_req = required_dynamic_load(4800, 500, 22000, 3.0)
        l10 = (c_req / 4800) ** 3

        assert l10 * 1e6 / (60 * 500) == pytest.approx(22000)


class TestExplicitSelection:
    """Tests for bearings selected by designation."""

    def test_6205_reference_scenario(self, bearing_6205_inputs):
        """Test 6205 at 4800 N / 500 rpm falls short of 22000 h."""
        result = select_bearing(bearing_6205_inputs)

        assert result.bearing.designation == "6205"
        assert result.selection_mode == SelectionMode.EXPLICIT
        assert result.x_factor == 1.0
        assert result.y_factor == 0.0
        assert result.equivalent_load_n == pytest.approx(4800)
        assert result.l10_million_rev == pytest.approx((14000 / 4800) ** 3)
        assert result.l10h_hours == pytest.approx(827.0, abs=1.0)
        assert not result.is_adequate
        assert result.status.startswith("Inadequate")
        assert result.life_ratio == pytest.approx(result.l10h_hours / 22000)

    def test_required_rating(self, bearing_6205_inputs):
        """Test the dynamic rating needed for the desired life."""
        result = select_bearing(bearing_6205_inputs)
        assert result.required_dynamic_load_n == pytest.approx(4800 * 660 ** (1 / 3))

    def test_larger_rating_longer_life(self, bearing_6205_inputs):
        """Test life grows with the dynamic rating at equal load."""
        small = select_bearing(bearing_6205_inputs)
        large = select_bearing(bearing_6205_inputs.model_copy(update={"designation": "6305"}))

        assert large.l10h_hours > small.l10h_hours

    def test_adequate_bearing(self):
        """Test adequacy is exactly L10h >= desired life."""
        inputs = BearingInput(radial_load_n=1000, speed_rpm=500, designation="6205")
        result = select_bearing(inputs)

        assert result.is_adequate
        assert result.status.startswith("Adequate")
        assert result.warnings == []

    def test_roller_bearing_exponent(self):
        """Test roller bearings use p = 10/3."""
        inputs = BearingInput(radial_load_n=5000, speed_rpm=500, designation="NU 205")
        result = select_bearing(inputs)

        assert result.life_exponent == pytest.approx(10 / 3)
        assert result.l10_million_rev == pytest.approx((28600 / 5000) ** (10 / 3))

    def test_paired_mounting_halves_axial_load(self):
        """Test paired bearings carry half the axial load each."""
        inputs = BearingInput(
            radial_load_n=1000,
            axial_load_n=2000,
            speed_rpm=500,
            designation="7205",
            mounting=BearingMounting.PAIRED,
        )
        result = select_bearing(inputs)

        assert result.effective_axial_load_n == pytest.approx(1000)
        assert result.equivalent_load_n == pytest.approx(0.41 * 1000 + 0.87 * 1000)

    def test_static_check(self, bearing_6205_inputs):
        """Test S0 = C0 / P0 against 1.5."""
        result = select_bearing(bearing_6205_inputs)

        assert result.static_check.safety == pytest.approx(7800 / 4800)
        assert result.static_check.is_safe

    def test_static_check_fails(self):
        """Test an overloaded small bearing is statically unsafe."""
        inputs = BearingInput(radial_load_n=4800, speed_rpm=500, designation="6200")
        result = select_bearing(inputs)

        assert not result.static_check.is_safe
        assert any("static safety" in w for w in result.warnings)

    def test_speed_check(self):
        """Test speeds above the grease limit are reported."""
        inputs = BearingInput(radial_load_n=500, speed_rpm=16000, designation="6205")
        result = select_bearing(inputs)

        assert result.speed_check.grease_ok is False
        assert result.speed_check.oil_ok is True
        assert any("grease speed limit" in w for w in result.warnings)

    def test_no_speed_limits(self):
        """Test rows without limiting speeds skip the speed check."""
        inputs = BearingInput(radial_load_n=500, speed_rpm=500, designation="6211")
        assert select_bearing(inputs).speed_check is None

    def test_designation_beats_bore(self):
        """Test explicit designation is used even when a bore is given."""
        inputs = BearingInput(
            radial_load_n=4800, speed_rpm=500, designation="6205", bore_diameter_mm=50
        )
        result = select_bearing(inputs)

        assert result.bearing.designation == "6205"
        assert result.selection_mode == SelectionMode.EXPLICIT

    def test_unknown_designation(self):
        """Test an unknown designation is a selection error."""
        inputs = BearingInput(radial_load_n=4800, speed_rpm=500, designation="9999")

        with pytest.raises(MissingBearingError):
            select_bearing(inputs)


class TestAutoSearch:
    """Tests for search by bore and kind."""

    def test_smallest_adequate_candidate(self):
        """Test a light load picks the first candidate."""
        inputs = BearingInput(radial_load_n=1000, speed_rpm=500, bore_diameter_mm=25)
        result = select_bearing(inputs)

        assert result.bearing.designation == "6005"
        assert result.selection_mode == SelectionMode.AUTO_SEARCH
        assert result.candidates_evaluated == 1
        assert result.is_adequate

    def test_search_steps_up_in_size(self):
        """Test the search walks up until the life is reached."""
        inputs = BearingInput(radial_load_n=4800, speed_rpm=500, bore_diameter_mm=25)
        result = select_bearing(inputs)

        assert result.bearing.designation == "6310"
        assert result.candidates_evaluated == 16
        assert result.is_adequate

    def test_candidates_sorted(self):
        """Test candidates are filtered by kind and ordered by size."""
        inputs = BearingInput(
            radial_load_n=1000, speed_rpm=500, bore_diameter_mm=30, kind="tapered_roller"
        )
        candidates = search_candidates(inputs)

        assert all(c.kind == BearingKind.TAPERED_ROLLER for c in candidates)
        assert all(c.bore_mm >= 30 for c in candidates)
        assert [c.bore_mm for c in candidates] == sorted(c.bore_mm for c in candidates)

    def test_none_adequate_returns_largest(self, caplog):
        """Test the largest candidate is reported when none is adequate."""
        inputs = BearingInput(radial_load_n=100000, speed_rpm=500, bore_diameter_mm=60)

        with caplog.at_level(logging.WARNING, logger="helixcalc.catalog.matcher"):
            result = select_bearing(inputs)

        assert result.bearing.designation == "6216"
        assert not result.is_adequate
        assert "No adequate" in caplog.text

    def test_no_candidates(self):
        """Test a bore beyond the catalog raises."""
        inputs = BearingInput(radial_load_n=1000, speed_rpm=500, bore_diameter_mm=500)

        with pytest.raises(NoBearingCandidateError):
            select_bearing(inputs)

    def test_no_reference(self):
        """Test a request without designation or bore raises."""
        inputs = BearingInput(radial_load_n=1000, speed_rpm=500)

        with pytest.raises(MissingBearingError):
            select_bearing(inputs)

    def test_errors_are_value_errors(self):
        """Test selection errors are reported like validation errors."""
        assert issubclass(MissingBearingError, BearingSelectionError)
        assert issubclass(NoBearingCandidateError, ValueError)

    def test_custom_catalog(self):
        """Test the search uses a caller-supplied catalog."""
        entry = find_bearing("6208")
        inputs = BearingInput(radial_load_n=1000, speed_rpm=500, bore_diameter_mm=25)

        result = select_bearing(inputs, catalog=[entry])

        assert result.bearing.designation == "6208"

    def test_evaluate_bearing_directly(self):
        """Test evaluate_bearing records mode and candidate count."""
        inputs = BearingInput(radial_load_n=1000, speed_rpm=500)
        result = evaluate_bearing(find_bearing("6205"), inputs, SelectionMode.AUTO_SEARCH, 3)

        assert result.selection_mode == SelectionMode.AUTO_SEARCH
        assert result.candidates_evaluated == 3


class TestCatalogLoader:
    """Tests for JSON bearing catalogs."""

    def test_round_trip(self, tmp_path):
        """Test a dumped catalog loads back unchanged."""
        path = tmp_path / "bearings.json"
        entries = BEARING_CATALOG[:5]

        dump_bearing_catalog(entries, str(path))
        loaded = load_bearing_catalog(str(path))

        assert loaded == entries

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_bearing_catalog(str(tmp_path / "missing.json"))

    def test_not_a_list(self, tmp_path):
        """Test a JSON object is rejected."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"designation": "6205"}))

        with pytest.raises(ValueError):
            load_bearing_catalog(str(path))
