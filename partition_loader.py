

"""
partition_loader.py
Split the scenario CSV into the static layout read by the Scenario & Region page.

Writes one JSON file per (Scenario, Region) pair plus a dimensions.json manifest:
    public/<Scenario>/<Region>.json   -> [[Variable, Year, Value], ...]
    public/dimensions.json            -> {"Scenarios": [...], "Regions": [...]}

Example (local shell):
    python partition_loader.py data/electricity-generation-2023.csv public
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from futures_core.loaders.partitions import write_partitions
from futures_core.loaders.records import load_records
from futures_core.pipeline.errors import PipelineError


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Split the scenario CSV into per-(Scenario, Region) JSON files.")
    parser.add_argument("csv_path", help="Source CSV (Region,Scenario,Variable,Year,Value)")
    parser.add_argument("out_dir", nargs="?", default="public", help="Output directory (default: public)")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        records = load_records(args.csv_path)
    except (OSError, PipelineError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        paths = write_partitions(records, args.out_dir)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"{len(records)} records -> {len(paths) - 1} partitions in {args.out_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
