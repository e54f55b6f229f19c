from __future__ import annotations

import argparse
from pathlib import Path

from farsdata.errors import FarsDataError
from farsdata.logging_config import configure_logging
from farsdata.plotting.state_map import fars_map_state, map_spec_from_config
from farsdata.settings import get_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Plot one state's fatal accident locations for one FARS year."
    )
    parser.add_argument("state", type=int, help="Numeric FARS STATE code, e.g. 42.")
    parser.add_argument("year", type=int, help="Accident file year, e.g. 2013.")
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory containing accident_<year>.csv.bz2 files (default: config.paths.data_dir).",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="HTML output path (default: <config.paths.output_dir>/state_<state>_<year>.html).",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Also open the figure in a browser.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging()

    config = get_config()
    data_dir = Path(args.data_dir) if args.data_dir else config.paths.data_dir
    output = (
        Path(args.output)
        if args.output
        else config.paths.output_dir / f"state_{args.state}_{args.year}.html"
    )

    try:
        fig = fars_map_state(
            args.state,
            args.year,
            data_dir=data_dir,
            output_path=output,
            spec=map_spec_from_config(config),
        )
    except (FileNotFoundError, FarsDataError) as exc:
        raise SystemExit(str(exc)) from exc

    if fig is None:
        return
    print(f"Saved map: {output}")
    if args.show:
        fig.show()


if __name__ == "__main__":
    main()
