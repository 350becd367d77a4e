"""Translate a Condor flight plan into XCSoar files.

Usage:
  uv run python scripts/translate_task.py \\
      --task Slovenia.fpl \\
      --origin-lat 46.0 --origin-lon 14.0 \\
      --profile Default.prf \\
      --output-dir out/

Defaults for the limits and the path prefix come from ``CONDOR2NAV_*``
environment variables (a ``.env`` file is honoured).
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from condor2nav.condor.coords import FlatEarthConverter
from condor2nav.condor.parser import CondorTaskParser
from condor2nav.task.errors import TranslationError
from condor2nav.task.models import TranslateOptions
from condor2nav.web.service import TranslationService
from condor2nav.xcsoar.profile import ProfileStore
from condor2nav.xcsoar.writer import OutputWriter

load_dotenv()


def main() -> None:
    ap = argparse.ArgumentParser(description="Translate a Condor task for XCSoar")
    ap.add_argument("--task", required=True, help="Condor flight plan (.fpl)")
    ap.add_argument("--origin-lat", type=float, required=True, help="Latitude of landscape (0, 0)")
    ap.add_argument("--origin-lon", type=float, required=True, help="Longitude of landscape (0, 0)")
    ap.add_argument("--profile", help="Existing XCSoar profile to update")
    ap.add_argument("--output-dir", default="xcsoar_out", help="Directory for generated files")
    ap.add_argument("--aat-minutes", type=int, help="Minimum AAT time (default: from the task)")
    ap.add_argument("--max-task-points", type=int, help="Task slots of the target format")
    ap.add_argument("--max-start-points", type=int, help="Alternate start slots")
    ap.add_argument("--path-prefix", help="Directory prefix as seen by XCSoar")
    ap.add_argument("--no-wp-file", action="store_true", help="Do not generate Condor.dat")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = TranslateOptions.from_env(
            aat_minutes=args.aat_minutes,
            max_task_points=args.max_task_points,
            max_start_points=args.max_start_points,
            path_prefix=args.path_prefix,
            generate_waypoint_file=False if args.no_wp_file else None,
        )
    except ValueError as exc:
        print(f"  [!] Invalid CONDOR2NAV_* setting: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Task      : {args.task}")
    print(f"Origin    : {args.origin_lat}, {args.origin_lon}")
    print(f"Output    : {args.output_dir}")
    print()

    print("1/3  Reading flight plan...")
    try:
        task = CondorTaskParser().parse_file(args.task)
    except (OSError, TranslationError) as exc:
        print(f"  [!] {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"     {max(len(task.turnpoints) - 1, 0)} turnpoints, {len(task.penalty_zones)} penalty zones")

    print("2/3  Translating...")
    profile = ProfileStore.load(args.profile) if args.profile else None
    svc = TranslationService(FlatEarthConverter(args.origin_lat, args.origin_lon))
    try:
        output = svc.run(task, options, profile)
    except TranslationError as exc:
        print(f"  [!] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"     {len(output.warnings)} warnings")

    print("3/3  Writing files...")
    for path in OutputWriter(args.output_dir).commit(output.files()):
        print(f"     {path}")
    print("\n[OK] Done")


if __name__ == "__main__":
    main()
