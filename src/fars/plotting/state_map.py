"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: accident rows for one state, already cleaned by
``fars.analysis.clean_coordinates``.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Map extent:
    The geo subplot is clipped to the bounding box of the valid
    latitudes and longitudes (each axis from its own non-missing values),
    padded by ``_PAD_DEGREES`` so edge points are not drawn on the frame.
    State borders are drawn as the background.

Points:
    One small dot per row that has both a valid latitude and longitude.
"""

from __future__ import annotations

from typing import Any, Dict

import pandas as pd
import plotly.graph_objects as go

from ..analysis.coordinates import coordinate_bounds, plottable_points
from ..utils.validation import require_columns

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_PAD_DEGREES: float = 0.25

_MARKER_STYLE: Dict[str, Any] = {
    'color': 'black',
    'size': 3,
    'symbol': 'circle',
    'opacity': 0.8,
}

_GEO_STYLE: Dict[str, Any] = {
    'scope': 'north america',
    'projection_type': 'mercator',
    'resolution': 50,
    'showland': True,
    'landcolor': 'rgb(243, 243, 243)',
    'showlakes': True,
    'lakecolor': 'white',
    'showcountries': True,
    'countrycolor': 'gray',
    'showsubunits': True,
    'subunitcolor': 'gray',
    'subunitwidth': 1,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_accidents(
    df_state: pd.DataFrame,
    state_num: int,
    year: int,
) -> go.Figure:
    """
    Build a scatter map of accident locations for one state and year.

    Args:
        df_state: Accident rows with ``LATITUDE`` / ``LONGITUD`` columns,
            sentinels already replaced by NaN.
        state_num: State code, used in the title.
        year: Reporting year, used in the title.

    Returns:
        ``plotly.graph_objects.Figure`` with a single ``Scattergeo`` trace.

    Raises:
        ValueError: If coordinate columns are missing, or no row has a
            valid latitude and longitude.
    """
    require_columns(df_state, ['LATITUDE', 'LONGITUD'], name="df_state")

    points = plottable_points(df_state)
    bounds = coordinate_bounds(df_state)
    if points.empty or bounds is None:
        raise ValueError(
            f"No valid coordinates for STATE {state_num} in {year}"
        )

    lat_min, lat_max = bounds['lat_range']
    lon_min, lon_max = bounds['lon_range']

    fig = go.Figure()
    fig.add_trace(go.Scattergeo(
        lon=points['LONGITUD'],
        lat=points['LATITUDE'],
        mode='markers',
        marker=_MARKER_STYLE,
        name='Accident',
        showlegend=False,
        hovertemplate=(
            "Lat: %{lat:.4f}<br>"
            "Lon: %{lon:.4f}<extra></extra>"
        ),
    ))

    fig.update_geos(
        lataxis_range=[lat_min - _PAD_DEGREES, lat_max + _PAD_DEGREES],
        lonaxis_range=[lon_min - _PAD_DEGREES, lon_max + _PAD_DEGREES],
        **_GEO_STYLE,
    )
    fig.update_layout(
        title=f"FARS Accidents – STATE {state_num}, {year} (n={len(points)})",
        margin=dict(l=10, r=10, t=50, b=10),
        template='plotly_white',
    )

    return fig
