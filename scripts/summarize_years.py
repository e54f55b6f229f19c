from __future__ import annotations

import argparse
from pathlib import Path

from farsdata.analytics.summary import fars_summarize_years
from farsdata.logging_config import configure_logging
from farsdata.settings import get_config
from farsdata.storage.datasets import available_years, save_csv


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Count fatal accidents per month for one or more FARS years."
    )
    parser.add_argument(
        "years",
        nargs="*",
        type=int,
        help="Years to summarize (default: every accident_<year>.csv.bz2 in the data directory).",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory containing accident_<year>.csv.bz2 files (default: config.paths.data_dir).",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Write the summary to this CSV path instead of printing it.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging()

    config = get_config()
    data_dir = Path(args.data_dir) if args.data_dir else config.paths.data_dir
    years = args.years or available_years(data_dir)
    if not years:
        raise SystemExit(f"No accident files found in {data_dir}")

    summary = fars_summarize_years(years, data_dir)
    if summary.empty:
        print("No accident rows loaded.")
        return

    if args.output:
        path = save_csv(summary, Path(args.output))
        print(f"Saved summary: {path}")
    else:
        print(summary.to_string(index=False))


if __name__ == "__main__":
    main()
