from __future__ import annotations

from typing import Optional

import pandas as pd
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse

from farsdata.api.schemas import EmptyReason, ItemsResponse, ReasonCode
from farsdata.errors import FarsDataError, InvalidStateError
from farsdata.ingestion.schemas import AccidentRecord
from farsdata.plotting.state_map import build_state_map, map_spec_from_config, state_points
from farsdata.settings import get_config
from farsdata.storage.datasets import make_filename


router = APIRouter()

_POINT_COLUMNS = ["STATE", "MONTH", "LATITUDE", "LONGITUD"]


def _load_state_points(state: int, year: int) -> pd.DataFrame:
    config = get_config()
    try:
        return state_points(state, year, config.paths.data_dir, map_spec_from_config(config))
    except FileNotFoundError as exc:
        raise HTTPException(
            status_code=404,
            detail=f"{make_filename(year)} not found in the data directory.",
        ) from exc
    except InvalidStateError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except FarsDataError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@router.get("/states/{state}/accidents", response_model=ItemsResponse[AccidentRecord])
def list_state_accidents(
    state: int,
    year: int = Query(..., description="Accident file year."),
    columns: Optional[list[str]] = Query(
        default=None, description="Extra accident-file columns to include in each record."
    ),
) -> ItemsResponse[AccidentRecord]:
    points = _load_state_points(state, year)
    if points.empty:
        return ItemsResponse[AccidentRecord](
            reason=EmptyReason(code=ReasonCode.NO_ACCIDENTS, message="no accidents to plot")
        )

    extra = [c for c in (columns or []) if c in points.columns and c not in _POINT_COLUMNS]
    df = points[_POINT_COLUMNS + extra]
    # Sentinel-cleaned coordinates are NaN; Pydantic needs real `None`.
    df = df.astype(object).where(pd.notnull(df), None)
    return ItemsResponse[AccidentRecord](
        items=[AccidentRecord(**record) for record in df.to_dict(orient="records")]
    )


@router.get("/states/{state}/map", response_class=HTMLResponse)
def get_state_map(
    state: int,
    year: int = Query(..., description="Accident file year."),
) -> HTMLResponse:
    points = _load_state_points(state, year)
    if points.empty:
        return HTMLResponse(content="<p>no accidents to plot</p>")

    fig = build_state_map(
        points,
        map_spec_from_config(),
        title=f"Fatal accidents, state {state}, {year}",
    )
    return HTMLResponse(content=fig.to_html(full_html=True, include_plotlyjs="cdn"))
