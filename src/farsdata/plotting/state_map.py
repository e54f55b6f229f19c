"""Plot one state's accident locations for one year.

The figure is a plotly ``Scattergeo`` over a North America base map with US
state borders, zoomed to the latitude/longitude extent of the state's
accidents. Figures are returned to the caller; I/O only happens when an
``output_path`` is passed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pandas as pd
import plotly.graph_objects as go

from farsdata.errors import FarsDataError, InvalidStateError
from farsdata.quality.schema import LATITUDE_SENTINEL, LONGITUDE_SENTINEL, REQUIRED_COLUMNS
from farsdata.settings import AppConfig, get_config
from farsdata.storage.datasets import accident_path, as_int, ensure_parent_dir, fars_read

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MapSpec:
    """Rendering and cleaning parameters for state maps."""

    scope: str = "north america"
    marker_size: int = 3
    marker_color: str = "black"
    # Extra margin added around the data extent, in degrees.
    padding_degrees: float = 0.0
    latitude_sentinel: float = LATITUDE_SENTINEL
    longitude_sentinel: float = LONGITUDE_SENTINEL


def map_spec_from_config(config: Optional[AppConfig] = None) -> MapSpec:
    resolved = config or get_config()
    return MapSpec(
        scope=resolved.plotting.scope,
        marker_size=int(resolved.plotting.marker_size),
        marker_color=resolved.plotting.marker_color,
        padding_degrees=float(resolved.plotting.padding_degrees),
        latitude_sentinel=float(resolved.fars.latitude_sentinel),
        longitude_sentinel=float(resolved.fars.longitude_sentinel),
    )


def clean_sentinels(df: pd.DataFrame, spec: Optional[MapSpec] = None) -> pd.DataFrame:
    """Return a copy with out-of-range LATITUDE/LONGITUD values replaced by NaN."""

    spec = spec or MapSpec()
    out = df.copy()
    lon = pd.to_numeric(out["LONGITUD"], errors="coerce")
    lat = pd.to_numeric(out["LATITUDE"], errors="coerce")
    out["LONGITUD"] = lon.mask(lon > spec.longitude_sentinel)
    out["LATITUDE"] = lat.mask(lat > spec.latitude_sentinel)
    return out


def state_points(
    state_num: object,
    year: object,
    data_dir: Optional[Path] = None,
    spec: Optional[MapSpec] = None,
) -> pd.DataFrame:
    """Load `year`, validate `state_num` and return that state's rows with sentinels cleaned.

    Raises FileNotFoundError when the year's file is missing and
    InvalidStateError when `state_num` does not occur in its STATE column.
    """

    path = accident_path(year, data_dir)
    data = fars_read(path)
    missing = [c for c in REQUIRED_COLUMNS["map"] if c not in data.columns]
    if missing:
        raise FarsDataError(f"{path} is missing columns: {', '.join(missing)}")
    state = as_int(state_num)

    states = set(pd.to_numeric(data["STATE"], errors="coerce").dropna().astype(int).unique())
    if state not in states:
        raise InvalidStateError(state)

    subset = data[pd.to_numeric(data["STATE"], errors="coerce") == state]
    if subset.empty:
        return subset.copy()
    return clean_sentinels(subset, spec).reset_index(drop=True)


def _axis_range(values: pd.Series, padding: float) -> Optional[list[float]]:
    valid = values.dropna()
    if valid.empty:
        return None
    return [float(valid.min()) - padding, float(valid.max()) + padding]


def build_state_map(points: pd.DataFrame, spec: Optional[MapSpec] = None, title: str | None = None) -> go.Figure:
    spec = spec or MapSpec()

    fig = go.Figure()
    fig.add_trace(
        go.Scattergeo(
            lon=points["LONGITUD"],
            lat=points["LATITUDE"],
            mode="markers",
            marker=dict(size=spec.marker_size, color=spec.marker_color, symbol="circle"),
            hoverinfo="lon+lat",
            showlegend=False,
        )
    )

    geo: dict[str, object] = dict(
        scope=spec.scope,
        projection=dict(type="mercator"),
        showland=True,
        landcolor="white",
        showcountries=True,
        showsubunits=True,
        subunitcolor="gray",
    )
    lat_range = _axis_range(points["LATITUDE"], spec.padding_degrees)
    lon_range = _axis_range(points["LONGITUD"], spec.padding_degrees)
    if lat_range is not None and lon_range is not None:
        geo["lataxis"] = dict(range=lat_range)
        geo["lonaxis"] = dict(range=lon_range)

    fig.update_layout(
        title=title,
        geo=geo,
        margin=dict(l=10, r=10, t=40 if title else 10, b=10),
    )
    return fig


def fars_map_state(
    state_num: object,
    year: object,
    data_dir: Optional[Path] = None,
    output_path: Optional[Path] = None,
    spec: Optional[MapSpec] = None,
) -> Optional[go.Figure]:
    """Plot the accidents of state `state_num` in `year`.

    Returns ``None`` (after logging "no accidents to plot") when the state has
    no rows. That message is logged at INFO on ``farsdata.plotting.state_map``;
    it is only visible once logging is configured (see ``configure_logging``),
    since Python's fallback handler shows WARNING and above. When `output_path`
    is given the figure is also written as HTML.
    """

    points = state_points(state_num, year, data_dir, spec)
    if points.empty:
        logger.info("no accidents to plot")
        return None

    fig = build_state_map(points, spec, title=f"Fatal accidents, state {as_int(state_num)}, {year}")
    if output_path is not None:
        output_path = Path(output_path)
        ensure_parent_dir(output_path)
        fig.write_html(str(output_path), include_plotlyjs="cdn")
        logger.info("Wrote map for state %s (%d accidents) to %s", state_num, len(points), output_path)
    return fig
