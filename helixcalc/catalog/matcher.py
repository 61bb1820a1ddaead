"""
Bearing selection logic.

Evaluates catalog bearings against a load, speed and life requirement.
Two protocols are supported:
- explicit: one bearing named by designation
- auto search: the smallest adequate bearing of a kind with a large
  enough bore

An inadequate life is reported as data. Only requests that resolve to no
bearing at all raise.
"""

import logging
from typing import Optional, Sequence

from helixcalc.catalog.data import BEARING_CATALOG, find_bearing
from helixcalc.catalog.models import BearingCatalogEntry
from helixcalc.errors import MissingBearingError, NoBearingCandidateError
from helixcalc.models.inputs import BearingInput
from helixcalc.models.outputs import BearingResult, SelectionMode, SpeedCheck, StaticCheck
from helixcalc.physics.bearings import (
    basic_rating_life,
    equivalent_dynamic_load,
    equivalent_static_load,
    load_factors,
    rating_life_hours,
    required_dynamic_load,
)
from helixcalc.physics.constants import MIN_STATIC_SAFETY

logger = logging.getLogger(__name__)


def _check_speed(entry: BearingCatalogEntry, speed_rpm: float) -> Optional[SpeedCheck]:
    """Compare the speed with the catalog limits, if the entry has any."""
    grease = entry.limiting_speed_grease_rpm
    oil = entry.limiting_speed_oil_rpm
    if grease is None and oil is None:
        return None
    return SpeedCheck(
        speed_rpm=speed_rpm,
        limit_grease_rpm=grease,
        limit_oil_rpm=oil,
        grease_ok=None if grease is None else speed_rpm <= grease,
        oil_ok=None if oil is None else speed_rpm <= oil,
    )


def evaluate_bearing(
    entry: BearingCatalogEntry,
    inputs: BearingInput,
    mode: SelectionMode = SelectionMode.EXPLICIT,
    candidates_evaluated: int = 1,
) -> BearingResult:
    """
    Rating life and static safety of one catalog bearing.

    Args:
        entry: Catalog bearing
        inputs: Loads, speed and desired life
        mode: Protocol that chose the bearing
        candidates_evaluated: Number of bearings looked at to reach this one

    Returns:
        BearingResult; is_adequate is exactly L10h >= desired life
    """
    fr = inputs.radial_load_n
    fa = inputs.effective_axial_load_n

    factors = load_factors(entry.kind, fr, fa, entry.static_load_n)
    p = equivalent_dynamic_load(fr, fa, factors)
    exponent = entry.life_exponent

    l10 = basic_rating_life(entry.dynamic_load_n, p, exponent)
    l10h = rating_life_hours(l10, inputs.speed_rpm)
    c_req = required_dynamic_load(p, inputs.speed_rpm, inputs.desired_life_hours, exponent)
    is_adequate = l10h >= inputs.desired_life_hours

    p0 = equivalent_static_load(fr, fa)
    s0 = entry.static_load_n / p0
    static_check = StaticCheck(
        equivalent_static_load_n=p0,
        static_load_rating_n=entry.static_load_n,
        safety=s0,
        required_safety=MIN_STATIC_SAFETY,
        is_safe=s0 >= MIN_STATIC_SAFETY,
    )
    speed_check = _check_speed(entry, inputs.speed_rpm)

    warnings = []
    if is_adequate:
        status = f"Adequate: L10h {l10h:.0f} h >= {inputs.desired_life_hours:.0f} h"
    else:
        status = f"Inadequate: L10h {l10h:.0f} h < {inputs.desired_life_hours:.0f} h"
        warnings.append(f"{entry.designation}: {status}")
    if not static_check.is_safe:
        warnings.append(f"{entry.designation}: static safety {s0:.2f} below {MIN_STATIC_SAFETY}")
    if speed_check is not None and speed_check.oil_ok is False:
        warnings.append(f"{entry.designation}: {inputs.speed_rpm:.0f} rpm exceeds the oil speed limit")
    elif speed_check is not None and speed_check.grease_ok is False:
        warnings.append(f"{entry.designation}: {inputs.speed_rpm:.0f} rpm exceeds the grease speed limit")

    return BearingResult(
        bearing=entry,
        selection_mode=mode,
        x_factor=factors.x,
        y_factor=factors.y,
        e_factor=factors.e,
        radial_load_n=fr,
        effective_axial_load_n=fa,
        equivalent_load_n=p,
        life_exponent=exponent,
        l10_million_rev=l10,
        l10h_hours=l10h,
        desired_life_hours=inputs.desired_life_hours,
        required_dynamic_load_n=c_req,
        life_ratio=l10h / inputs.desired_life_hours,
        is_adequate=is_adequate,
        status=status,
        static_check=static_check,
        speed_check=speed_check,
        candidates_evaluated=candidates_evaluated,
        warnings=warnings,
    )


def search_candidates(
    inputs: BearingInput,
    catalog: Optional[Sequence[BearingCatalogEntry]] = None,
) -> list[BearingCatalogEntry]:
    """
    Catalog entries of the requested kind with a large enough bore.

    Returns:
        Entries sorted by (bore, outer diameter, dynamic rating)
    """
    rows = catalog if catalog is not None else BEARING_CATALOG
    candidates = [
        entry for entry in rows
        if entry.kind == inputs.kind and entry.bore_mm >= inputs.bore_diameter_mm
    ]
    candidates.sort(key=lambda e: (e.bore_mm, e.outer_diameter_mm, e.dynamic_load_n))
    return candidates


def search_bearing(
    inputs: BearingInput,
    catalog: Optional[Sequence[BearingCatalogEntry]] = None,
) -> BearingResult:
    """
    Smallest adequate bearing for the request.

    Candidates are evaluated in ascending size. The first adequate one is
    returned; if none is adequate, the largest candidate is returned with
    its inadequate life.

    Raises:
        MissingBearingError: If no bore diameter is given
        NoBearingCandidateError: If no entry matches bore and kind
    """
    if inputs.bore_diameter_mm is None:
        raise MissingBearingError("Auto search needs bore_diameter_mm")

    candidates = search_candidates(inputs, catalog)
    if not candidates:
        raise NoBearingCandidateError(
            f"No {inputs.kind.value} bearing with bore >= {inputs.bore_diameter_mm} mm in catalog"
        )

    result = None
    for count, entry in enumerate(candidates, start=1):
        result = evaluate_bearing(entry, inputs, SelectionMode.AUTO_SEARCH, count)
        logger.debug(f"Bearing {entry.designation}: L10h={result.l10h_hours:.0f} h")
        if result.is_adequate:
            return result

    logger.warning(
        f"No adequate {inputs.kind.value} bearing for bore >= {inputs.bore_diameter_mm} mm; "
        f"reporting {result.bearing.designation}"
    )
    return result


def select_bearing(
    inputs: BearingInput,
    catalog: Optional[Sequence[BearingCatalogEntry]] = None,
) -> BearingResult:
    """
    Select and evaluate a bearing.

    A designation selects that bearing explicitly; otherwise the catalog is
    searched by bore diameter and kind.

    Args:
        inputs: Bearing request
        catalog: Bearing catalog (built-in catalog if None)

    Raises:
        MissingBearingError: No designation and no bore, or an unknown designation
        NoBearingCandidateError: No entry matches bore and kind
    """
    if inputs.designation is not None:
        entry = find_bearing(inputs.designation, catalog)
        if entry is None:
            raise MissingBearingError(f"Bearing {inputs.designation!r} not found in catalog")
        return evaluate_bearing(entry, inputs, SelectionMode.EXPLICIT)

    if inputs.bore_diameter_mm is None:
        raise MissingBearingError("Give a bearing designation or a bore diameter")
    return search_bearing(inputs, catalog)
