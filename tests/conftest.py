from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest


def write_accidents(directory: Path, year: int, rows: list[dict]) -> Path:
    path = directory / f"accident_{year}.csv.bz2"
    pd.DataFrame(rows).to_csv(path, index=False, compression="bz2")
    return path


def _row(month: int, state: int, lat: float, lon: float, st_case: int) -> dict:
    return {
        "STATE": state,
        "ST_CASE": st_case,
        "MONTH": month,
        "LATITUDE": lat,
        "LONGITUD": lon,
        "FATALS": 1,
    }


@pytest.fixture()
def accident_dir(tmp_path) -> Path:
    """Two years of accident files: 2013 (3 January, 2 February rows) and 2014."""

    data_dir = tmp_path / "data"
    data_dir.mkdir()
    write_accidents(
        data_dir,
        2013,
        [
            _row(1, 42, 40.5, -77.0, 420001),
            _row(1, 42, 99.9999, -76.0, 420002),
            _row(1, 1, 33.0, -86.5, 10001),
            _row(2, 42, 41.0, 999.9999, 420003),
            _row(2, 1, 32.5, -87.0, 10002),
        ],
    )
    write_accidents(
        data_dir,
        2014,
        [
            _row(1, 1, 33.1, -86.4, 10003),
            _row(3, 42, 40.9, -75.5, 420004),
        ],
    )
    return data_dir
