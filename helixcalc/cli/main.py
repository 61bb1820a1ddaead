"""
Command-line interface for the helical reducer calculator.

Usage:
    python -m helixcalc make-example --kind reducer [--output reducer.json]
    python -m helixcalc reducer --input reducer.json [--output result.json] [--report]
    python -m helixcalc stage --input stage.json
    python -m helixcalc bearing --input bearing.json [--catalog bearings.json]
    python -m helixcalc shaft --input shaft.json
    python -m helixcalc export --input reducer.json [--shaft shaft.json] [--bearing b.json ...] [--positions p.json] --output-dir out
    python -m helixcalc report --input result.json
    python -m helixcalc materials [--category gear|general]
    python -m helixcalc bearings [--kind deep_groove_ball] [--catalog bearings.json] [--output out.json]
    python -m helixcalc serve [--port 8000]
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import BaseModel

from helixcalc import __version__
from helixcalc.catalog.data import BEARING_CATALOG, MATERIALS_BY_CATEGORY
from helixcalc.catalog.loader import dump_bearing_catalog, load_bearing_catalog
from helixcalc.catalog.matcher import select_bearing
from helixcalc.catalog.models import BearingKind, MaterialCategory
from helixcalc.cli.readable_output import REPORTS, print_readable_output
from helixcalc.export.dat import generate_dat_files, write_dat_files
from helixcalc.generator.reducer import size_reducer
from helixcalc.generator.shaft import size_shaft
from helixcalc.generator.stage import size_gear_stage
from helixcalc.models.inputs import (
    EXAMPLE_MODELS,
    BearingInput,
    DrawingPositions,
    GearStageInput,
    ReducerInput,
    ShaftInput,
    example_input,
)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="helixcalc",
        description="Helical reducer calculator - gear stage, bearing life and shaft sizing "
                    "by the DIN hand-calculation method.",
    )
    parser.add_argument("--version", action="version", version=f"helixcalc {__version__}")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging on stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # make-example command
    example_parser = subparsers.add_parser(
        "make-example",
        help="Generate an example input JSON file",
    )
    example_parser.add_argument(
        "--kind", "-k",
        choices=list(EXAMPLE_MODELS),
        default="reducer",
        help="Input kind (default: reducer)",
    )
    example_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Output path for example file (default: <kind>_input.json)",
    )

    # calculation commands
    for name, help_text in (
        ("reducer", "Size a two-stage helical reducer"),
        ("stage", "Size a single helical gear stage"),
        ("bearing", "Select a rolling bearing for a required life"),
        ("shaft", "Size a shaft and its parallel key"),
    ):
        calc_parser = subparsers.add_parser(name, help=help_text)
        calc_parser.add_argument(
            "--input", "-i",
            type=Path,
            required=True,
            help=f"Path to JSON input file with {name} parameters",
        )
        calc_parser.add_argument(
            "--output", "-o",
            type=Path,
            default=None,
            help="Path to save JSON output (prints to stdout if not specified)",
        )
        calc_parser.add_argument(
            "--report",
            action="store_true",
            help="Print a readable calculation report instead of JSON",
        )
        if name == "bearing":
            calc_parser.add_argument(
                "--catalog",
                type=Path,
                default=None,
                help="Bearing catalog JSON file (default: built-in catalog)",
            )

    # export command
    export_parser = subparsers.add_parser(
        "export",
        help="Write .dat files for a drafting tool",
    )
    export_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to reducer input JSON",
    )
    export_parser.add_argument(
        "--shaft",
        type=Path,
        default=None,
        help="Path to shaft input JSON",
    )
    export_parser.add_argument(
        "--bearing",
        type=Path,
        action="append",
        default=[],
        help="Path to bearing input JSON (repeatable)",
    )
    export_parser.add_argument(
        "--positions",
        type=Path,
        default=None,
        help="Path to drawing positions JSON (writes yerles.dat)",
    )
    export_parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("data"),
        help="Output directory for .dat files (default: data)",
    )

    # report command
    report_parser = subparsers.add_parser(
        "report",
        help="Print a readable report of a saved result JSON file",
    )
    report_parser.add_argument(
        "--input", "-i",
        type=Path,
        required=True,
        help="Path to result JSON file",
    )

    # materials command
    materials_parser = subparsers.add_parser(
        "materials",
        help="List catalog materials",
    )
    materials_parser.add_argument(
        "--category",
        choices=[c.value for c in MaterialCategory],
        default=MaterialCategory.GEAR.value,
        help="Material catalog (default: gear)",
    )

    # bearings command
    bearings_parser = subparsers.add_parser(
        "bearings",
        help="List catalog bearings",
    )
    bearings_parser.add_argument(
        "--kind",
        choices=[k.value for k in BearingKind],
        default=None,
        help="Only list bearings of this kind",
    )
    bearings_parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Bearing catalog JSON file (default: built-in catalog)",
    )
    bearings_parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Write the listed bearings to a catalog JSON file",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the FastAPI web server",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port", "-p",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    return parser


def configure_logging(verbose: bool) -> None:
    """Send library logs to stderr; DEBUG with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_json(path: Path) -> dict:
    with open(path) as f:
        return json.load(f)


def _emit(result: BaseModel, kind: str, args: argparse.Namespace) -> None:
    """Write JSON to --output or stdout; --report prints the text report."""
    output_json = result.model_dump_json(indent=2)

    if args.output:
        with open(args.output, "w") as f:
            f.write(output_json)
        print(f"\nResults saved to {args.output}", file=sys.stderr)

    if args.report:
        print(REPORTS[kind](result.model_dump(mode="json")))
    elif not args.output:
        print(output_json)


def _print_warnings(warnings: list[str]) -> None:
    if warnings:
        print("\nWarnings:", file=sys.stderr)
        for w in warnings:
            print(f"  - {w}", file=sys.stderr)


def cmd_make_example(args: argparse.Namespace) -> int:
    """Generate an example input JSON file."""
    example = example_input(args.kind)
    output = args.output or Path(f"{args.kind}_input.json")

    with open(output, "w") as f:
        f.write(example.model_dump_json(indent=2, exclude_none=True))

    print(f"Created example input file: {output}")
    print("\nRun the calculation with:")
    print(f"  python -m helixcalc {args.kind} --input {output}")

    return 0


def cmd_reducer(args: argparse.Namespace) -> int:
    """Size a two-stage reducer."""
    try:
        inputs = ReducerInput(**_load_json(args.input))

        print(f"\nHelical Reducer", file=sys.stderr)
        print(f"Design: {inputs.name}", file=sys.stderr)
        print(
            f"P: {inputs.power_kw:.2f} kW | "
            f"{inputs.input_speed_rpm:.0f} -> {inputs.output_speed_rpm:.0f} rpm",
            file=sys.stderr,
        )

        result = size_reducer(inputs)
        _emit(result, "reducer", args)

        print(f"\nSummary:", file=sys.stderr)
        print(
            f"  Teeth: {result.tooth_counts.z1}/{result.tooth_counts.z2}, "
            f"{result.tooth_counts.z3}/{result.tooth_counts.z4} | "
            f"ratio {result.total_ratio_actual:.4f} (error {result.ratio_analysis.error_pct:.2f}%)",
            file=sys.stderr,
        )
        print(
            f"  Modules: {result.stage1.geometry.module_mm} / {result.stage2.geometry.module_mm} mm | "
            f"adequate: {result.is_adequate}",
            file=sys.stderr,
        )
        _print_warnings(result.warnings)

        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_stage(args: argparse.Namespace) -> int:
    """Size a single gear stage."""
    try:
        inputs = GearStageInput(**_load_json(args.input))
        result = size_gear_stage(inputs)
        _emit(result, "stage", args)

        print(
            f"\nSummary: m = {result.geometry.module_mm} mm "
            f"({result.governing_criterion.value}) | adequate: {result.is_adequate}",
            file=sys.stderr,
        )
        _print_warnings(result.warnings)

        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_bearing(args: argparse.Namespace) -> int:
    """Select a bearing."""
    try:
        inputs = BearingInput(**_load_json(args.input))
        catalog = load_bearing_catalog(str(args.catalog)) if args.catalog else None
        if catalog is not None:
            print(f"Loaded {len(catalog)} bearings from {args.catalog}", file=sys.stderr)

        result = select_bearing(inputs, catalog)
        _emit(result, "bearing", args)

        print(
            f"\nSummary: {result.bearing.designation} | "
            f"L10h {result.l10h_hours:.0f} h | adequate: {result.is_adequate}",
            file=sys.stderr,
        )
        _print_warnings(result.warnings)

        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_shaft(args: argparse.Namespace) -> int:
    """Size a shaft."""
    try:
        inputs = ShaftInput(**_load_json(args.input))
        result = size_shaft(inputs)
        _emit(result, "shaft", args)

        print(
            f"\nSummary: d = {result.standard_diameter_mm} mm "
            f"(min {result.minimum_diameter_mm:.2f}) | safe: {result.is_safe} | "
            f"key safety {result.keyway_check.safety:.2f}",
            file=sys.stderr,
        )
        _print_warnings(result.warnings)

        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_export(args: argparse.Namespace) -> int:
    """Write .dat files for a reducer design."""
    try:
        reducer = size_reducer(ReducerInput(**_load_json(args.input)))
        shaft = size_shaft(ShaftInput(**_load_json(args.shaft))) if args.shaft else None
        bearings = [select_bearing(BearingInput(**_load_json(p))) for p in args.bearing]
        positions = DrawingPositions(**_load_json(args.positions)) if args.positions else None

        files = generate_dat_files(reducer, shaft, bearings, positions)
        written = write_dat_files(files, str(args.output_dir))

        print(f"\nExported {len(written)} files to {args.output_dir}", file=sys.stderr)
        for path in written:
            print(f"  {path}", file=sys.stderr)

        return 0

    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON input: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_report(args: argparse.Namespace) -> int:
    """Print a readable report of a saved result."""
    try:
        print_readable_output(args.input)
        return 0
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in {args.input}: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_materials(args: argparse.Namespace) -> int:
    """List catalog materials."""
    category = MaterialCategory(args.category)
    materials = list(MATERIALS_BY_CATEGORY[category].values())

    print(f"{'Material':<32} {'sigma_K':>8} {'sigma_Ak':>8} {'sigma_D':>8} {'PhD':>6} {'HB':>5}")
    for m in materials:
        print(
            f"{m.name:<32} {m.ultimate_strength_mpa:>8.0f} {m.yield_strength_mpa:>8.0f} "
            f"{m.durability_limit_mpa:>8.0f} {m.surface_pressure_mpa:>6.0f} {m.hardness_hb:>5.0f}"
        )
    print(f"\n{len(materials)} {category.value} materials", file=sys.stderr)
    return 0


def cmd_bearings(args: argparse.Namespace) -> int:
    """List catalog bearings."""
    try:
        catalog = load_bearing_catalog(str(args.catalog)) if args.catalog else BEARING_CATALOG
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    rows = [b for b in catalog if args.kind is None or b.kind == BearingKind(args.kind)]
    if args.output:
        dump_bearing_catalog(rows, str(args.output))
        print(f"Saved {len(rows)} bearings to {args.output}", file=sys.stderr)
        return 0

    print(f"{'Designation':<12} {'d':>5} {'D':>5} {'B':>6} {'C':>7} {'C0':>7}  Kind")
    for b in rows:
        print(
            f"{b.designation:<12} {b.bore_mm:>5.0f} {b.outer_diameter_mm:>5.0f} {b.width_mm:>6.2f} "
            f"{b.dynamic_load_n:>7.0f} {b.static_load_n:>7.0f}  {b.kind.value}"
        )
    print(f"\n{len(rows)} bearings", file=sys.stderr)
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the FastAPI web server."""
    try:
        import uvicorn

        print(f"\nStarting Helical Reducer Calculator API", file=sys.stderr)
        print(f"API: http://{args.host}:{args.port}/", file=sys.stderr)
        print(f"Docs: http://{args.host}:{args.port}/docs", file=sys.stderr)
        print("\nPress Ctrl+C to stop\n", file=sys.stderr)

        uvicorn.run(
            "helixcalc.api.server:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
        return 0

    except ImportError as e:
        print(f"Error: Missing dependency: {e}", file=sys.stderr)
        print("Install with: pip install uvicorn fastapi", file=sys.stderr)
        return 1


def cli(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(args.verbose)

    commands = {
        "make-example": cmd_make_example,
        "reducer": cmd_reducer,
        "stage": cmd_stage,
        "bearing": cmd_bearing,
        "shaft": cmd_shaft,
        "export": cmd_export,
        "report": cmd_report,
        "materials": cmd_materials,
        "bearings": cmd_bearings,
        "serve": cmd_serve,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


def main():
    """Console script entrypoint wrapper."""
    return cli()


if __name__ == "__main__":
    sys.exit(cli())
