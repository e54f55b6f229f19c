from __future__ import annotations

from typing import Optional

import pandas as pd
from fastapi import APIRouter, Query
from fastapi.responses import Response

from farsdata.analytics.summary import summarize_frames
from farsdata.api.schemas import EmptyReason, InvalidYear, MonthCounts, ReasonCode, SummaryResponse
from farsdata.ingestion.years import load_years
from farsdata.settings import get_config
from farsdata.storage.datasets import available_years


router = APIRouter()


def _requested_years(years: Optional[list[int]]) -> list[int]:
    if years:
        return list(years)
    return available_years(get_config().paths.data_dir)


def _cell(value: object) -> Optional[int]:
    if value is None or pd.isna(value):
        return None
    return int(value)  # type: ignore[arg-type]


@router.get("/years", response_model=list[int])
def list_years() -> list[int]:
    return available_years(get_config().paths.data_dir)


@router.get("/summary", response_model=SummaryResponse)
def get_summary(
    years: Optional[list[int]] = Query(
        default=None, description="Years to summarize (default: every accident file present)."
    ),
) -> SummaryResponse:
    config = get_config()
    requested = _requested_years(years)
    results = load_years(requested, config.paths.data_dir)

    invalid = [
        InvalidYear(year=str(r.year), code=r.error.code, message=r.error.message)
        for r in results
        if r.error is not None
    ]
    summary = summarize_frames(r.data for r in results)
    year_columns = [c for c in summary.columns if c != "MONTH"]

    if summary.empty:
        return SummaryResponse(
            reason=EmptyReason(
                code=ReasonCode.NO_DATA,
                message="No accident rows were loaded for the requested years.",
                suggestion="Check that accident_<year>.csv.bz2 files exist in paths.data_dir.",
            ),
            invalid_years=invalid,
        )

    items = [
        MonthCounts(
            MONTH=int(row["MONTH"]),
            counts={str(col): _cell(row[col]) for col in year_columns},
        )
        for row in summary.to_dict(orient="records")
    ]
    return SummaryResponse(
        items=items,
        years=[str(c) for c in year_columns],
        invalid_years=invalid,
    )


@router.get("/exports/summary.csv")
def export_summary_csv(
    years: Optional[list[int]] = Query(default=None),
) -> Response:
    config = get_config()
    results = load_years(_requested_years(years), config.paths.data_dir)
    summary = summarize_frames(r.data for r in results)
    return Response(
        content=summary.to_csv(index=False),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": 'attachment; filename="fars_summary.csv"'},
    )
