"""
FARS Monthly Summary (Functional Core)

Pure functions only. No I/O, no side effects.
Input/output is DataFrames.

Package Location: src/fars/analysis/summary.py

Shapes:
    Year-Month Record  -> columns [MONTH, year], one row per accident.
    Summary Table      -> column MONTH followed by one count column per
                          year (column label is the integer year).
                          Counts are nullable ``Int64``; a (year, month)
                          pair with no accidents is <NA>, never 0.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pandas as pd

from ..utils.validation import require_columns

_MONTH_COL: str = "MONTH"
_YEAR_COL: str = "year"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def to_year_month(df: pd.DataFrame, year: int) -> pd.DataFrame:
    """
    Reduce an accident table to a Year-Month Record.

    The ``year`` column is attached from *year*, not read from any column
    of the file (FARS files carry their own ``YEAR`` column which is
    ignored here).

    Args:
        df: Accident table with at least a ``MONTH`` column.
        year: Reporting year to attach.

    Returns:
        New DataFrame with exactly the columns ``[MONTH, year]``.

    Raises:
        KeyError: If *df* has no ``MONTH`` column.
    """
    if _MONTH_COL not in df.columns:
        raise KeyError(f"accident table has no '{_MONTH_COL}' column")

    record = df[[_MONTH_COL]].copy()
    record[_YEAR_COL] = int(year)
    return record.reset_index(drop=True)


def summarize_year_months(
    records: Sequence[Optional[pd.DataFrame]],
) -> pd.DataFrame:
    """
    Count accidents per month and spread years into columns.

    ``None`` entries (years that failed to load) contribute no rows, and
    neither do rows with a blank ``MONTH``.

    Args:
        records: Year-Month Records, possibly containing ``None``.

    Returns:
        Summary Table sorted by ``MONTH``.  When no record contributes
        any rows the result is an empty DataFrame with the single column
        ``MONTH``.

    Example::

        >>> summarize_year_months([rec_2013, None, rec_2015])
           MONTH  2013  2015
        0      1  2230  2368
        1      2  1952  1968
    """
    frames: List[pd.DataFrame] = [r for r in records if r is not None]
    for frame in frames:
        require_columns(frame, [_MONTH_COL, _YEAR_COL], name="year-month record")

    frames = [f for f in frames if not f.empty]
    if not frames:
        return pd.DataFrame({_MONTH_COL: pd.Series(dtype="int64")})

    combined = pd.concat(frames, ignore_index=True)
    combined = combined.dropna(subset=[_MONTH_COL])
    if combined.empty:
        return pd.DataFrame({_MONTH_COL: pd.Series(dtype="int64")})

    counts = (
        combined.groupby([_YEAR_COL, _MONTH_COL])
        .size()
        .rename("n")
        .reset_index()
    )

    summary = counts.pivot(index=_MONTH_COL, columns=_YEAR_COL, values="n")
    summary.index = summary.index.astype("int64")
    summary = summary.sort_index().astype("Int64")
    summary.columns.name = None

    return summary.reset_index()
