"""
Command-line interface for thread and fastener geometry generation.
"""

import argparse
import logging
import sys
from pathlib import Path

from ..enums import PartKind, LeadInSide, BoltStyle, NutStyle, WasherSeries, SetScrewPoint
from ..calculator.catalog import CatalogError
from ..calculator.lead_in import LeadInEnds
from ..calculator.validation import validate_thread
from ..io.loaders import (
    PartSpec,
    PartsFile,
    load_parts_json,
    save_parts_json,
    thread_from_spec,
    part_from_spec,
)

EXPORT_SUFFIXES = {"step": ".step", "stl": ".stl", "gltf": ".glb"}


def _choices(enum_type):
    return [member.value.replace("_", "-") for member in enum_type]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate STEP/STL files for threads, bolts, nuts, washers and holes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # A 30mm M8 threaded rod with chamfers at both ends
  screwforge-generate --thread M8 --length 30 --lead-in both

  # Left-hand, two-start trapezoidal lead screw
  screwforge-generate --thread Tr16x4 --length 100 --left --starts 2

  # DIN 912 socket head cap screw, 0.2mm printing clearance
  screwforge-generate --kind bolt --bolt-style socket-head-cap --thread M6 --length 20 --tolerance 0.2

  # DIN 934 hex nut as STL
  screwforge-generate --kind nut --thread M10 --format stl

  # ISO 14581 Torx countersunk screw and a DIN 508 T-slot nut
  screwforge-generate --kind bolt --bolt-style torx-countersunk --thread M5 --length 16
  screwforge-generate --kind nut --nut-style t-slot --thread M6

  # Internal thread cutter for a 12mm deep M5 hole
  screwforge-generate --kind threaded-hole --thread M5 --length 12 --lead-in leading

  # Thread parameters and validation only, no geometry
  screwforge-generate --thread E27 --length 20 --info

  # Every part in a parts file
  screwforge-generate parts.json -o out/
        """
    )

    parser.add_argument(
        'parts_file',
        type=str,
        nargs='?',
        help='JSON parts file (omit to describe a single part with --thread)'
    )

    parser.add_argument(
        '--thread',
        type=str,
        help='Thread designation: M8, M8x1, E27, Tr16x4, 1/4, 1/4-28 (LH suffix for left-hand)'
    )

    parser.add_argument(
        '--length',
        type=float,
        default=None,
        help='Length in mm (thread length, bolt length or hole depth)'
    )

    parser.add_argument(
        '--kind',
        choices=_choices(PartKind),
        default='thread',
        help='What to generate (default: thread)'
    )

    parser.add_argument(
        '--name',
        type=str,
        default=None,
        help='Output file name without suffix (default: derived from thread and kind)'
    )

    parser.add_argument(
        '--left',
        action='store_true',
        help='Left-hand thread'
    )

    parser.add_argument(
        '--starts',
        type=int,
        default=1,
        help='Number of thread starts (default: 1)'
    )

    parser.add_argument(
        '--tolerance',
        type=float,
        default=0.0,
        help='Clearance in mm; external features shrink, internal ones grow (default: 0)'
    )

    parser.add_argument(
        '--lead-in',
        choices=_choices(LeadInSide),
        default='none',
        help='Thread ends that get a standard lead-in chamfer (default: none)'
    )

    parser.add_argument(
        '--bolt-style',
        choices=_choices(BoltStyle),
        default='hex-head',
        help='Bolt construction for --kind bolt / clearance-hole (default: hex-head)'
    )

    parser.add_argument(
        '--unthreaded-length',
        type=float,
        default=0.0,
        help='Plain shank length under the head in mm (default: 0)'
    )

    parser.add_argument(
        '--set-screw-point',
        choices=_choices(SetScrewPoint),
        default='flat',
        help='Set screw point (default: flat)'
    )

    parser.add_argument(
        '--recessed-head',
        action='store_true',
        help='Clearance hole with a recess that sinks the bolt head'
    )

    parser.add_argument(
        '--nut-style',
        choices=_choices(NutStyle),
        default='hex',
        help='Nut construction for --kind nut (default: hex)'
    )

    parser.add_argument(
        '--washer-series',
        choices=_choices(WasherSeries),
        default='normal',
        help='Washer series: normal (ISO 7089) or large (ISO 7093)'
    )

    parser.add_argument(
        '-o', '--output-dir',
        type=str,
        default='.',
        help='Output directory (default: current directory)'
    )

    parser.add_argument(
        '--format',
        choices=sorted(EXPORT_SUFFIXES),
        default='step',
        help='Export format (default: step)'
    )

    parser.add_argument(
        '--no-save',
        action='store_true',
        help='Build geometry without writing files'
    )

    parser.add_argument(
        '--info',
        action='store_true',
        help='Print thread parameters and validation messages, build nothing'
    )

    parser.add_argument(
        '--view',
        action='store_true',
        help='Show parts in OCP viewer (requires ocp_vscode)'
    )

    parser.add_argument(
        '--save-json',
        type=str,
        default=None,
        help='Write the parts being generated to a JSON parts file'
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log build steps in detail'
    )
    verbosity.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Only log warnings and errors'
    )

    return parser


def _configure_logging(args) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def parts_from_args(args) -> PartsFile:
    """Single-part PartsFile described by command-line flags."""
    kind = args.kind.replace("-", "_")
    thread = args.thread + " LH" if args.left and not args.thread.upper().endswith("LH") else args.thread
    name = args.name or f"{args.thread.replace('/', '_')}_{kind}"
    part = PartSpec(
        name=name,
        kind=kind,
        thread=thread,
        length_mm=args.length,
        starts=args.starts,
        lead_in=args.lead_in,
        bolt_style=args.bolt_style,
        unthreaded_length_mm=args.unthreaded_length,
        set_screw_point=args.set_screw_point,
        recessed_head=args.recessed_head,
        nut_style=args.nut_style,
        washer_series=args.washer_series,
    )
    return PartsFile(tolerance_mm=args.tolerance, parts=[part])


def print_thread_info(part: PartSpec) -> None:
    thread = thread_from_spec(part)
    print(f"\n{part.name}: {thread.describe()} ({type(thread.form).__name__})")
    print(f"  Major diameter: {thread.major_diameter:.3f} mm")
    print(f"  Minor diameter: {thread.minor_diameter:.3f} mm")
    print(f"  Pitch diameter: {thread.pitch_diameter:.3f} mm")
    print(f"  Pitch:          {thread.pitch:.3f} mm")
    print(f"  Lead:           {thread.lead:.3f} mm")
    print(f"  Depth:          {thread.depth:.3f} mm")
    if thread.minimum_pitch > 0:
        print(f"  Minimum pitch:  {thread.minimum_pitch:.3f} mm")

    result = validate_thread(thread, part.length_mm, LeadInEnds.for_side(part.lead_in))
    for message in result.messages:
        print(f"  [{message.severity.value.upper()}] {message.message}")
        if message.suggestion:
            print(f"      -> {message.suggestion}")


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    if args.parts_file is None and args.thread is None:
        parser.error("give a parts file or --thread")

    # Load parts
    try:
        if args.parts_file is not None:
            print(f"Loading parts from {args.parts_file}...")
            parts_file = load_parts_json(args.parts_file)
        else:
            parts_file = parts_from_args(args)
            for part in parts_file.parts:
                if part.needs_length and part.length_mm is None:
                    raise ValueError(f"--kind {args.kind} needs --length")
    except Exception as e:
        print(f"Error loading parts: {e}", file=sys.stderr)
        return 1

    if args.save_json:
        save_parts_json(parts_file, args.save_json)
        print(f"Saved parts file: {args.save_json}")

    if args.info:
        try:
            for part in parts_file.parts:
                print_thread_info(part)
        except CatalogError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    output_dir = Path(args.output_dir)
    if not args.no_save:
        output_dir.mkdir(parents=True, exist_ok=True)

    built = []
    for part in parts_file.parts:
        try:
            geometry = part_from_spec(part, parts_file.tolerance_for(part))
        except (CatalogError, ValueError) as e:
            print(f"Error in part '{part.name}': {e}", file=sys.stderr)
            return 1

        print(f"\nGenerating {part.name} ({part.kind.value}, {part.thread})...")
        shape = geometry.build()
        print(f"  Volume: {shape.volume:.2f} mm³")
        built.append((part.name, shape))

        if not args.no_save:
            output_file = output_dir / f"{part.name}{EXPORT_SUFFIXES[args.format]}"
            if args.format == "stl":
                geometry.export_stl(str(output_file))
            elif args.format == "gltf":
                geometry.export_gltf(str(output_file))
            else:
                geometry.export_step(str(output_file))
            print(f"  Saved: {output_file}")

    if args.view:
        try:
            from ocp_vscode import show
            show(*[shape for _, shape in built], names=[name for name, _ in built])
            print("Displayed in OCP viewer")
        except ImportError:
            print("\nWarning: ocp_vscode not available for viewing", file=sys.stderr)
            print("Install with: pip install ocp_vscode", file=sys.stderr)

    print(f"\nGenerated {len(built)} part(s)")
    return 0


if __name__ == '__main__':
    sys.exit(main())
