"""
Drafting tool data export.

Writes the numeric fields the gearbox drawing script reads as small .dat
records. The script reads each record by position, so the file names and
field order below are fixed:

- Disli1.dat, Disli2.dat: Bo, b1, b2, Mn, h1, h2, do1, do2, ao, db1, db2,
  dt1, dt2, z1, z2, Ft, Fa, Fr (h1 and h2 are written as 0; the script
  derives addendum and dedendum from Mn)
- devir.dat: N1, N2, N3
- yerles.dat: YN1, YN2, YN3, YN4, ao1, ao2, one value per line (only when
  drawing positions are given)
- shaft.dat: d, d_min, RA_H, RB_H, RA_V, RB_V, b, h, t1, t2
- bearing.dat: one line per bearing: index, P0, C0, C_req, P, L10h, status

Numbers are written with two decimals; the bearing status is plain text.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from helixcalc.models.inputs import DrawingPositions
from helixcalc.models.outputs import BearingResult, GearStageResult, ReducerResult, ShaftResult

logger = logging.getLogger(__name__)

STAGE_FILES = ("Disli1.dat", "Disli2.dat")
SPEED_FILE = "devir.dat"
POSITION_FILE = "yerles.dat"
SHAFT_FILE = "shaft.dat"
BEARING_FILE = "bearing.dat"

BEARING_ADEQUATE = "SELECTED BEARING ADEQUATE"
BEARING_INADEQUATE = "BEARING LIFE INSUFFICIENT"


def format_dat_value(value: Union[float, str]) -> str:
    """Numbers with two decimals, text unchanged."""
    if isinstance(value, str):
        return value
    return f"{float(value):.2f}"


def format_dat_line(values: Sequence[Union[float, str]]) -> str:
    """Join values with commas, one record per line."""
    return ", ".join(format_dat_value(v) for v in values) + "\n"


def _stage_record(stage: GearStageResult) -> str:
    g = stage.geometry
    f = stage.pinion_forces
    return format_dat_line([
        stage.helix_angle_deg,
        g.face_width_mm,
        g.face_width_mm,
        g.module_mm,
        0,
        0,
        g.pitch_diameter_pinion_mm,
        g.pitch_diameter_gear_mm,
        g.center_distance_mm,
        g.tip_diameter_pinion_mm,
        g.tip_diameter_gear_mm,
        g.root_diameter_pinion_mm,
        g.root_diameter_gear_mm,
        g.pinion_teeth,
        g.gear_teeth,
        f.tangential_n,
        f.axial_n,
        f.radial_n,
    ])


def _position_record(positions: DrawingPositions, reducer: ReducerResult) -> str:
    ao1 = positions.ao1_mm if positions.ao1_mm is not None else reducer.stage1.geometry.center_distance_mm
    ao2 = positions.ao2_mm if positions.ao2_mm is not None else reducer.stage2.geometry.center_distance_mm
    values = [positions.yn1_mm, positions.yn2_mm, positions.yn3_mm, positions.yn4_mm, ao1, ao2]
    return "".join(format_dat_line([v]) for v in values)


def _shaft_record(shaft: ShaftResult) -> str:
    r = shaft.reactions
    key = shaft.keyway_check.keyway
    return format_dat_line([
        shaft.standard_diameter_mm,
        shaft.minimum_diameter_mm,
        r.a_horizontal_n,
        r.b_horizontal_n,
        r.a_vertical_n,
        r.b_vertical_n,
        key.width_mm,
        key.height_mm,
        key.shaft_depth_mm,
        key.hub_depth_mm,
    ])


def _bearing_record(index: int, bearing: BearingResult) -> str:
    return format_dat_line([
        index,
        bearing.static_check.equivalent_static_load_n,
        bearing.static_check.static_load_rating_n,
        bearing.required_dynamic_load_n,
        bearing.equivalent_load_n,
        bearing.l10h_hours,
        BEARING_ADEQUATE if bearing.is_adequate else BEARING_INADEQUATE,
    ])


def generate_dat_files(
    reducer: ReducerResult,
    shaft: Optional[ShaftResult] = None,
    bearings: Optional[Sequence[BearingResult]] = None,
    positions: Optional[DrawingPositions] = None,
) -> dict[str, str]:
    """
    Build the .dat records for a design.

    Args:
        reducer: Reducer result (always exported)
        shaft: Optional shaft result
        bearings: Optional bearing results, numbered from 1
        positions: Optional gear positions for the drawing layout

    Returns:
        Mapping of file name to file content
    """
    files = {
        STAGE_FILES[0]: _stage_record(reducer.stage1),
        STAGE_FILES[1]: _stage_record(reducer.stage2),
        SPEED_FILE: format_dat_line([
            reducer.speeds.input_rpm,
            reducer.speeds.intermediate_rpm,
            reducer.speeds.output_actual_rpm,
        ]),
    }
    if positions is not None:
        files[POSITION_FILE] = _position_record(positions, reducer)
    if shaft is not None:
        files[SHAFT_FILE] = _shaft_record(shaft)
    if bearings:
        files[BEARING_FILE] = "".join(
            _bearing_record(i, b) for i, b in enumerate(bearings, start=1)
        )
    return files


def write_dat_files(files: dict[str, str], directory: str) -> list[Path]:
    """
    Write generated records to a directory, creating it if needed.

    Returns:
        Paths of the written files
    """
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for name, content in files.items():
        path = out_dir / name
        with open(path, 'w') as f:
            f.write(content)
        written.append(path)
    logger.info(f"Wrote {len(written)} .dat files to {out_dir}")
    return written
