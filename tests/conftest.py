"""Shared fixtures: small bzip2 accident files written to a temp directory."""

from pathlib import Path
from typing import Dict, Iterable, Tuple

import pandas as pd
import pytest

# 2015 map rows: (STATE, LATITUDE, LONGITUD)
MAP_ROWS_2015 = [
    (6, 34.0, -118.0),
    (6, 37.5, -122.5),
    (6, 99.9999, 999.9999),   # both missing
    (6, 33.0, 999.9999),      # longitude missing, latitude still counts
    (6, 95.0, -125.0),        # latitude missing, longitude still counts
    (48, 30.0, -97.0),
    (12, 99.9999, 999.9999),  # state with no usable position
]


def _rows_by_month(year: int, month_counts: Dict[int, int], state: int) -> pd.DataFrame:
    rows = []
    case = 0
    for month, n in month_counts.items():
        for i in range(n):
            case += 1
            rows.append({
                'STATE': state,
                'ST_CASE': state * 10000 + case,
                'MONTH': month,
                'YEAR': year,
                'LATITUDE': 34.0 + 0.01 * i,
                'LONGITUD': -118.0 - 0.01 * i,
                'FATALS': 1,
            })
    return pd.DataFrame(rows)


def _rows_with_coords(year: int, rows: Iterable[Tuple[int, float, float]]) -> pd.DataFrame:
    return pd.DataFrame([
        {
            'STATE': state,
            'ST_CASE': state * 10000 + idx,
            'MONTH': 1 + idx % 12,
            'YEAR': year,
            'LATITUDE': lat,
            'LONGITUD': lon,
            'FATALS': 1,
        }
        for idx, (state, lat, lon) in enumerate(rows, start=1)
    ])


def write_accidents(data_dir: Path, year: int, df: pd.DataFrame) -> Path:
    path = data_dir / f"accident_{year}.csv.bz2"
    df.to_csv(path, index=False, compression='bz2')
    return path


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """
    Directory with four accident files:

    - 2013: month m has m accidents (STATE 6), 78 rows total.
    - 2014: two accidents per month except May (STATE 48), 22 rows.
    - 2015: hand-placed coordinates from ``MAP_ROWS_2015``.
    - 2016: malformed, no MONTH column.
    """
    directory = tmp_path / "extdata"
    directory.mkdir()

    write_accidents(
        directory, 2013,
        _rows_by_month(2013, {m: m for m in range(1, 13)}, state=6),
    )
    write_accidents(
        directory, 2014,
        _rows_by_month(2014, {m: 2 for m in range(1, 13) if m != 5}, state=48),
    )
    write_accidents(directory, 2015, _rows_with_coords(2015, MAP_ROWS_2015))
    write_accidents(
        directory, 2016,
        pd.DataFrame({'STATE': [1, 2], 'YEAR': [2016, 2016]}),
    )
    return directory
