"""
FARS Accident Coordinates (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/coordinates.py

Sentinel Rule:
    FARS encodes unknown positions with out-of-range values (e.g.
    LONGITUD 999.9999, LATITUDE 99.9999).  Any LONGITUD above 900 or
    LATITUDE above 90 is treated as missing: it is replaced with NaN so
    it drops out of both the axis ranges and the plotted point set.  The
    two columns are cleaned independently; a row keeps its valid
    coordinate even when the other one is a sentinel.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import numpy as np
import pandas as pd

from ..utils.validation import coerce_int, require_columns

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_STATE_COL: str = "STATE"
_LON_COL: str = "LONGITUD"
_LAT_COL: str = "LATITUDE"

# Values strictly above these are missing-value sentinels
LONGITUDE_SENTINEL: float = 900.0
LATITUDE_SENTINEL: float = 90.0


class InvalidStateError(ValueError):
    """
    Raised when a state code does not occur in the loaded accident table.

    Attributes:
        state_num: The rejected state code.
    """

    def __init__(self, state_num: int) -> None:
        self.state_num = state_num
        super().__init__(f"invalid STATE number: {state_num}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def select_state(df: pd.DataFrame, state_num: Any) -> pd.DataFrame:
    """
    Return the rows of *df* whose ``STATE`` equals *state_num*.

    Args:
        df: Accident table with a ``STATE`` column.
        state_num: State code, integer or integer-like string.

    Returns:
        Filtered copy of *df* (may be empty).

    Raises:
        ValueError: If *state_num* is not integer-like or ``STATE`` is
            missing.
        InvalidStateError: If the code never occurs in ``STATE``.
    """
    require_columns(df, [_STATE_COL], name="accident table")
    state = coerce_int(state_num, label="state_num")

    states = pd.to_numeric(df[_STATE_COL], errors="coerce")
    if state not in set(states.dropna().unique()):
        raise InvalidStateError(state)

    return df.loc[states == state].copy()


def clean_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Args:
        df: Accident rows with ``LONGITUD`` and ``LATITUDE`` columns.

    Returns:
        Copy of *df* with both columns as floats and sentinels set to NaN.
    """
    require_columns(df, [_LON_COL, _LAT_COL], name="accident table")

    df = df.copy()
    lon = pd.to_numeric(df[_LON_COL], errors="coerce").astype(float)
    lat = pd.to_numeric(df[_LAT_COL], errors="coerce").astype(float)

    df[_LON_COL] = lon.where(lon <= LONGITUDE_SENTINEL, np.nan)
    df[_LAT_COL] = lat.where(lat <= LATITUDE_SENTINEL, np.nan)
    return df


def plottable_points(df: pd.DataFrame) -> pd.DataFrame:
    """
    Keep only rows with both a valid longitude and latitude.

    Args:
        df: Output of ``clean_coordinates``.

    Returns:
        Subset of *df* with no NaN in either coordinate column.
    """
    return df.dropna(subset=[_LON_COL, _LAT_COL])


def coordinate_bounds(df: pd.DataFrame) -> Optional[Dict[str, Tuple[float, float]]]:
    """
    Compute the latitude/longitude bounding box of the valid values.

    Each axis is computed independently from its own non-missing values.

    Args:
        df: Output of ``clean_coordinates``.

    Returns:
        ``{'lat_range': (min, max), 'lon_range': (min, max)}``, or
        ``None`` if either column has no valid value.
    """
    lat = df[_LAT_COL].dropna()
    lon = df[_LON_COL].dropna()
    if lat.empty or lon.empty:
        return None

    return {
        'lat_range': (float(lat.min()), float(lat.max())),
        'lon_range': (float(lon.min()), float(lon.max())),
    }
