#!/usr/bin/env python3
import argparse
import logging
import sys
import os

from pydantic import ValidationError

# Ensure repository root on sys.path BEFORE importing local packages
repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from weekroster.intake import RosterFileError, load_roster_file
from weekroster.output_formatter import save_outputs, totals_to_frame
from weekroster.solver import solve_week

def main():
    parser = argparse.ArgumentParser(description="Schedule a week from a YAML roster file.")
    parser.add_argument("roster", help="path to the roster YAML file")
    parser.add_argument("--out", default="out", help="output directory (default: out)")
    parser.add_argument("--seed", type=int, default=None, help="seed for backfill picks")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        config, employees = load_roster_file(args.roster)
    except (OSError, RosterFileError, ValidationError) as e:
        print(f"Could not read roster: {e}", file=sys.stderr)
        sys.exit(2)
    if args.seed is not None:
        config = config.model_copy(update={"seed": args.seed})

    result = solve_week(employees, config)
    print(result.message)
    for gap in result.understaffed:
        print(f"  {gap.day} {gap.shift.name.title()}: {gap.staffed}/{gap.required}")
    print(totals_to_frame(result).to_string(index=False))

    paths = save_outputs(result, args.out, config.week_start)
    print(f"Outputs saved to {args.out}/ directory: {', '.join(os.path.basename(p) for p in paths.values())}")
    sys.exit(0 if result.success else 1)

if __name__ == "__main__":
    main()
