"""
Helpers to turn JSON calculation results into a compact, human-readable
calculation report. Works on result dicts, so saved output files can be
rendered again later.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def _fmt_float(value: Any, unit: str = "", zero_default: str = "n/a") -> str:
    """Safely format a float with optional unit suffix."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return zero_default
    suffix = f" {unit}" if unit else ""
    if abs(fval) >= 1000:
        return f"{fval:,.0f}{suffix}"
    return f"{fval:.2f}{suffix}"


def _ok(flag: Any) -> str:
    if flag is None:
        return "n/a"
    return "OK" if flag else "NOT OK"


def _stage_lines(stage: dict[str, Any]) -> list[str]:
    geom = stage.get("geometry", {})
    factors = stage.get("factors", {})
    safety = stage.get("safety", {})
    forces = stage.get("pinion_forces", {})

    module_note = " (override)" if stage.get("module_overridden") else ""
    lines = [
        f"{stage.get('name', 'Stage')}: {_fmt_float(stage.get('power_kw'), 'kW')} at "
        f"{_fmt_float(stage.get('speed_rpm'), 'rpm')}, T = {_fmt_float(stage.get('torque_nm'), 'N*m')}",
        f"  Teeth z1/z2: {geom.get('pinion_teeth')}/{geom.get('gear_teeth')} "
        f"(u = {_fmt_float(stage.get('ratio_actual'))}), beta {_fmt_float(stage.get('helix_angle_deg'), 'deg')}",
        f"  Module: bending {_fmt_float(stage.get('bending_module_mm'), 'mm')} | "
        f"surface {_fmt_float(stage.get('surface_module_mm'), 'mm')} | "
        f"governing {stage.get('governing_criterion')} -> m = {_fmt_float(geom.get('module_mm'), 'mm')}{module_note}",
        f"  d1/d2: {_fmt_float(geom.get('pitch_diameter_pinion_mm'))}/"
        f"{_fmt_float(geom.get('pitch_diameter_gear_mm'))} mm | "
        f"a = {_fmt_float(geom.get('center_distance_mm'), 'mm')} | "
        f"b = {_fmt_float(geom.get('face_width_mm'), 'mm')}",
        f"  Forces: Ft {_fmt_float(forces.get('tangential_n'), 'N')} | "
        f"Fr {_fmt_float(forces.get('radial_n'), 'N')} | Fa {_fmt_float(forces.get('axial_n'), 'N')}",
        f"  Factors: Kf {_fmt_float(factors.get('form_factor_pinion'))}/{_fmt_float(factors.get('form_factor_gear'))} "
        f"Kb {_fmt_float(factors.get('helix_factor'))} Ke {_fmt_float(factors.get('elastic_factor'))} "
        f"Ki {_fmt_float(factors.get('ratio_factor'))} Keps {_fmt_float(factors.get('contact_ratio_factor'))}",
        f"  Safety bending: pinion {_fmt_float(safety.get('bending_pinion'))}, "
        f"gear {_fmt_float(safety.get('bending_gear'))} "
        f"(req {_fmt_float(safety.get('required_bending'))}) {_ok(safety.get('bending_ok'))}",
        f"  Safety surface: pinion {_fmt_float(safety.get('surface_pinion'))}, "
        f"gear {_fmt_float(safety.get('surface_gear'))} "
        f"(req {_fmt_float(safety.get('required_surface'))}) {_ok(safety.get('surface_ok'))}",
    ]
    return lines


def _warning_lines(data: dict[str, Any]) -> list[str]:
    warnings = data.get("warnings") or []
    if not warnings:
        return []
    return ["Warnings:"] + [f"  - {w}" for w in warnings]


def format_reducer_report(data: dict[str, Any]) -> str:
    """Report for a reducer result dict."""
    ratio = data.get("ratio_analysis", {})
    speeds = data.get("speeds", {})
    lines = [
        f"Reducer: {data.get('name', '?')}",
        f"Ratio: target {_fmt_float(ratio.get('target_ratio'))} | "
        f"achieved {_fmt_float(ratio.get('actual_ratio'))} "
        f"({_fmt_float(ratio.get('stage1_ratio'))} x {_fmt_float(ratio.get('stage2_ratio'))}) | "
        f"error {_fmt_float(ratio.get('error_pct'), '%')}",
        f"Speeds: {_fmt_float(speeds.get('input_rpm'))} -> {_fmt_float(speeds.get('intermediate_rpm'))} -> "
        f"{_fmt_float(speeds.get('output_actual_rpm'))} rpm",
        f"Output: {_fmt_float(data.get('output_power_kw'), 'kW')}, "
        f"{_fmt_float(data.get('output_torque_nm'), 'N*m')}",
        "",
    ]
    lines += _stage_lines(data.get("stage1", {}))
    lines.append("")
    lines += _stage_lines(data.get("stage2", {}))
    lines += _warning_lines(data)
    return "\n".join(lines)


def format_stage_report(data: dict[str, Any]) -> str:
    """Report for a single gear stage result dict."""
    return "\n".join(_stage_lines(data) + _warning_lines(data))


def format_bearing_report(data: dict[str, Any]) -> str:
    """Report for a bearing result dict."""
    bearing = data.get("bearing", {})
    static = data.get("static_check", {})
    speed = data.get("speed_check")
    lines = [
        f"Bearing: {bearing.get('designation', '?')} ({bearing.get('kind')}) "
        f"d {_fmt_float(bearing.get('bore_mm'))} x D {_fmt_float(bearing.get('outer_diameter_mm'))} "
        f"x B {_fmt_float(bearing.get('width_mm'))} mm",
        f"  Selection: {data.get('selection_mode')} ({data.get('candidates_evaluated')} evaluated)",
        f"  X {_fmt_float(data.get('x_factor'))} Y {_fmt_float(data.get('y_factor'))} "
        f"e {_fmt_float(data.get('e_factor'))} | P = {_fmt_float(data.get('equivalent_load_n'), 'N')}",
        f"  C {_fmt_float(bearing.get('dynamic_load_n'), 'N')} | "
        f"C required {_fmt_float(data.get('required_dynamic_load_n'), 'N')}",
        f"  L10 {_fmt_float(data.get('l10_million_rev'), 'Mrev')} | "
        f"L10h {_fmt_float(data.get('l10h_hours'), 'h')} of {_fmt_float(data.get('desired_life_hours'), 'h')}",
        f"  {data.get('status')}",
        f"  Static: P0 {_fmt_float(static.get('equivalent_static_load_n'), 'N')} | "
        f"S0 {_fmt_float(static.get('safety'))} {_ok(static.get('is_safe'))}",
    ]
    if speed:
        lines.append(
            f"  Speed: grease {_ok(speed.get('grease_ok'))} | oil {_ok(speed.get('oil_ok'))}"
        )
    lines += _warning_lines(data)
    return "\n".join(lines)


def format_shaft_report(data: dict[str, Any]) -> str:
    """Report for a shaft result dict."""
    r = data.get("reactions", {})
    key = data.get("keyway_check", {})
    keyway = key.get("keyway", {})
    ext = data.get("extension", {})
    lines = [
        f"Shaft: {data.get('material', '?')}, T = {_fmt_float(data.get('torque_nm'), 'N*m')}",
        f"  Reactions A: V {_fmt_float(r.get('a_vertical_n'), 'N')} H {_fmt_float(r.get('a_horizontal_n'), 'N')} | "
        f"B: V {_fmt_float(r.get('b_vertical_n'), 'N')} H {_fmt_float(r.get('b_horizontal_n'), 'N')}",
        f"  Mb {_fmt_float(data.get('bending_moment_nm'), 'N*m')} | "
        f"Mv {_fmt_float(data.get('equivalent_moment_nm'), 'N*m')} (k = {_fmt_float(data.get('fatigue_multiplier'))})",
        f"  d min {_fmt_float(data.get('minimum_diameter_mm'), 'mm')} -> d = {_fmt_float(data.get('standard_diameter_mm'), 'mm')} | "
        f"extension {_fmt_float(ext.get('diameter_mm'))} x {_fmt_float(ext.get('length_mm'))} mm",
        f"  Stress: bending {_fmt_float(data.get('bending_stress_mpa'), 'MPa')} of "
        f"{_fmt_float(data.get('allowable_stress_mpa'), 'MPa')} {_ok(data.get('is_safe'))}",
        f"  Key {_fmt_float(keyway.get('width_mm'))} x {_fmt_float(keyway.get('height_mm'))} form {key.get('style')}: "
        f"p = {_fmt_float(key.get('pressure_mpa'), 'MPa')}, S = {_fmt_float(key.get('safety'))} {_ok(key.get('is_safe'))}",
    ]
    lines += _warning_lines(data)
    return "\n".join(lines)


REPORTS = {
    "reducer": format_reducer_report,
    "stage": format_stage_report,
    "bearing": format_bearing_report,
    "shaft": format_shaft_report,
}


def _detect_kind(data: dict[str, Any]) -> str:
    if "stage1" in data:
        return "reducer"
    if "bearing" in data:
        return "bearing"
    if "keyway_check" in data:
        return "shaft"
    return "stage"


def print_readable_output(json_path: Path) -> None:
    """
    Print a human-friendly report of a saved result JSON file.

    Args:
        json_path: Path to the JSON output file.
    """
    data = json.loads(Path(json_path).read_text())
    print(REPORTS[_detect_kind(data)](data))
