"""
FARS Report Generators (Imperative Shell)

Thin orchestration layer: derives file names, calls reader.py to load
tables, hands them to the functional core (analysis/) and plotting, and
renders the result.

No transformation logic lives here.

Package Location: src/fars/reports/generators.py

Usage::

    from fars.reports.generators import fars_summarize_years, fars_map_state

    summary = fars_summarize_years([2013, 2014, 2015])
    fars_map_state(6, 2014)                          # opens the figure
    fars_map_state(6, 2014, output_path="ca.html")   # writes HTML instead
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Optional

import pandas as pd

from ..data import reader
from ..analysis.coordinates import clean_coordinates, plottable_points, select_state
from ..analysis.summary import summarize_year_months
from ..plotting.state_map import plot_state_accidents
from ..utils.validation import coerce_int

log = logging.getLogger(__name__)


def fars_summarize_years(
    years: Iterable[Any],
    data_dir: Optional[reader.PathLike] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years that fail to load are logged and skipped; they get no column.

    Args:
        years: Sequence of years (ints or integer-like strings).
        data_dir: Directory holding the data files.

    Returns:
        DataFrame with a ``MONTH`` column and one nullable ``Int64``
        count column per loaded year.  If no year loads, an empty frame
        with only the ``MONTH`` column.

    Example::

        >>> fars_summarize_years([2013, 2014]).head(2)
           MONTH  2013  2014
        0      1  2230  2168
        1      2  1952  1893
    """
    years = list(years)
    batch = reader.load_years(years, data_dir=data_dir)

    if not batch.loaded:
        log.warning(
            "no data loaded for years: %s", years,
            extra={"years": [str(y) for y in years]},
        )

    summary = summarize_year_months(batch.records)
    log.debug(
        "Summarized %d of %d years", len(batch.loaded), len(years),
        extra={"failed": len(batch.warnings)},
    )
    return summary


def fars_map_state(
    state_num: Any,
    year: Any,
    data_dir: Optional[reader.PathLike] = None,
    output_path: Optional[reader.PathLike] = None,
) -> None:
    """
    Plot accident locations in one state for one year.

    When no accidents remain for the state, logs ``no accidents to plot``
    and returns without drawing.

    Args:
        state_num: State code (int or integer-like string).
        year: Reporting year.
        data_dir: Directory holding the data files.
        output_path: When given, the figure is written there as standalone
            HTML.  Otherwise ``Figure.show()`` is called.

    Raises:
        FileNotFoundError: If the year's data file does not exist.
        ValueError: If *state_num* or *year* is not integer-like.
        InvalidStateError: If *state_num* does not occur in ``STATE``.
    """
    filename = reader.make_filename(year)
    data = reader.fars_read(filename, data_dir=data_dir)
    state = coerce_int(state_num, label="state_num")

    data_sub = select_state(data, state)
    if data_sub.empty:
        log.info("no accidents to plot", extra={"state": state, "year": str(year)})
        return None

    data_sub = clean_coordinates(data_sub)
    if plottable_points(data_sub).empty:
        log.info(
            "no valid coordinates to plot",
            extra={"state": state, "year": str(year)},
        )
        return None

    fig = plot_state_accidents(data_sub, state, coerce_int(year, label="year"))

    if output_path is not None:
        out_path = Path(output_path)
        fig.write_html(str(out_path))
        log.info("State map saved → %s", out_path, extra={"state": state})
    else:
        fig.show()
    return None
