from __future__ import annotations

import errno
import re
from pathlib import Path
from typing import Optional

import pandas as pd

ACCIDENT_FILENAME = "accident_{year}.csv.bz2"
_ACCIDENT_FILENAME_RE = re.compile(r"^accident_(\d+)\.csv\.bz2$")


def as_int(value: object) -> int:
    """Coerce a year or state code to int, truncating fractions.

    Numeric strings such as ``"2013"`` or ``"42.0"`` are accepted.
    """

    if isinstance(value, str):
        return int(float(value.strip()))
    return int(value)  # type: ignore[call-overload]


def make_filename(year: object) -> str:
    """Return the accident file name for `year`, e.g. ``accident_2013.csv.bz2``."""

    return ACCIDENT_FILENAME.format(year=as_int(year))


def accident_path(year: object, data_dir: Optional[Path] = None) -> Path:
    filename = Path(make_filename(year))
    return filename if data_dir is None else Path(data_dir) / filename


def available_years(data_dir: Optional[Path] = None) -> list[int]:
    directory = Path(".") if data_dir is None else Path(data_dir)
    if not directory.is_dir():
        return []
    years: list[int] = []
    for path in directory.iterdir():
        match = _ACCIDENT_FILENAME_RE.match(path.name)
        if match and path.is_file():
            years.append(int(match.group(1)))
    return sorted(years)


def fars_read(filename: str | Path) -> pd.DataFrame:
    """Read one bz2-compressed FARS accident CSV into a DataFrame.

    Raises FileNotFoundError when `filename` is not an existing file. Columns and
    dtypes are whatever pandas infers; nothing is renamed or coerced.
    """

    path = Path(filename)
    if not path.is_file():
        raise FileNotFoundError(errno.ENOENT, f"file '{filename}' does not exist", str(filename))
    return pd.read_csv(path, compression="infer", low_memory=False)


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def save_csv(df: pd.DataFrame, path: Path) -> Path:
    ensure_parent_dir(path)
    df.to_csv(path, index=False)
    return path
