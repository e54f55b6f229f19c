"""Load the MONTH column of several years of accident files.

Each year is loaded on its own: a missing or unreadable file only removes that
year from the result, the rest of the batch is still returned.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from farsdata.errors import InvalidYearWarning
from farsdata.ingestion.errors import RECOVERABLE_LOAD_ERRORS, LoadErrorInfo, classify_load_error
from farsdata.quality.schema import REQUIRED_COLUMNS
from farsdata.storage.datasets import accident_path, as_int, fars_read

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class YearLoadResult:
    year: object
    filename: str
    data: Optional[pd.DataFrame] = None
    error: Optional[LoadErrorInfo] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _month_and_year(df: pd.DataFrame, year: object) -> pd.DataFrame:
    out = df.loc[:, list(REQUIRED_COLUMNS["summary"])].copy()
    # Numeric strings are stamped as the int used for the filename; numbers stay as given.
    out["year"] = as_int(year) if isinstance(year, str) else year
    return out


def load_years(years: Iterable[object], data_dir: Optional[Path] = None) -> list[YearLoadResult]:
    """Load (MONTH, year) rows for each year, returning one result per input year in order."""

    results: list[YearLoadResult] = []
    for year in years:
        path: Optional[Path] = None
        try:
            path = accident_path(year, data_dir)
            df = _month_and_year(fars_read(path), year)
        except RECOVERABLE_LOAD_ERRORS as exc:
            info = classify_load_error(exc)
            logger.warning("invalid year: %s (%s: %s)", year, info.code, info.message)
            filename = str(path) if path is not None else ""
            results.append(YearLoadResult(year=year, filename=filename, error=info))
            continue
        logger.debug("Loaded %d rows for year %s from %s", len(df), year, path)
        results.append(YearLoadResult(year=year, filename=str(path), data=df))
    return results


def fars_read_years(years: Iterable[object], data_dir: Optional[Path] = None) -> list[Optional[pd.DataFrame]]:
    """Return a list of (MONTH, year) DataFrames, with ``None`` for years that failed.

    A failed year emits an ``InvalidYearWarning`` naming it.
    """

    out: list[Optional[pd.DataFrame]] = []
    for result in load_years(years, data_dir):
        if not result.ok:
            warnings.warn(InvalidYearWarning(result.year), stacklevel=2)
        out.append(result.data)
    return out
