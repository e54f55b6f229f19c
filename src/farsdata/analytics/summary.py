"""Monthly accident counts per year.

`fars_summarize_years` stacks the (MONTH, year) rows of each requested year and
cross-tabulates them into a wide table: one row per MONTH, one column per year.
Month/year cells with no accidents are left missing (``<NA>``) rather than 0, so
"no rows in the file" stays distinguishable from "file not loaded".
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from farsdata.ingestion.years import fars_read_years


def summarize_frames(frames: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """Count rows per (year, MONTH) across `frames` and pivot years into columns."""

    loaded = [df for df in frames if df is not None]
    if not loaded:
        return pd.DataFrame(columns=["MONTH"])

    combined = pd.concat(loaded, ignore_index=True)
    if combined.empty:
        return pd.DataFrame(columns=["MONTH"])

    counts = combined.groupby(["year", "MONTH"]).size().rename("n").reset_index()
    wide = counts.pivot(index="MONTH", columns="year", values="n")
    wide = wide.sort_index().sort_index(axis=1).astype("Int64")
    wide.columns.name = None
    return wide.reset_index()


def fars_summarize_years(years: Iterable[object], data_dir: Optional[Path] = None) -> pd.DataFrame:
    """Return accident counts with one row per MONTH and one column per loaded year.

    Years whose file is missing or unreadable are skipped with a warning. If no
    year loads, the result is an empty DataFrame with only a ``MONTH`` column.
    """

    return summarize_frames(fars_read_years(years, data_dir))


def summary_to_long(summary: pd.DataFrame) -> pd.DataFrame:
    """Melt a wide summary back to (MONTH, year, n) rows, dropping missing cells."""

    if summary.empty or "MONTH" not in summary.columns:
        return pd.DataFrame(columns=["MONTH", "year", "n"])
    long = summary.melt(id_vars="MONTH", var_name="year", value_name="n")
    long = long.dropna(subset=["n"])
    long["n"] = long["n"].astype(int)
    return long.sort_values(["year", "MONTH"]).reset_index(drop=True)
