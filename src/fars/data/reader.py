"""
FARS Data Reader (Imperative Shell)

Resolves yearly accident files inside the data directory and loads them
into DataFrames.  All file access in the package goes through here.

Package Location: src/fars/data/reader.py

File naming:
    One bzip2-compressed CSV per year, ``accident_<year>.csv.bz2``.
    ``make_filename`` only derives the name; existence is checked when
    the file is read.

Data directory:
    Every reader takes an optional ``data_dir``.  When omitted the
    ``extdata/`` directory shipped inside the installed package is used,
    resolved from this module's location rather than the caller's
    working directory.

Batch loading:
    ``load_years`` isolates failures per year.  A year whose file is
    missing or unreadable is logged as ``invalid year: <year>`` and left
    as ``None`` in the output; the remaining years still load.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..analysis.summary import to_year_month
from ..utils.validation import coerce_int

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_DATA_DIR: Path = Path(__file__).resolve().parent.parent / "extdata"

_FILENAME_TEMPLATE: str = "accident_{year}.csv.bz2"
_FILENAME_RE = re.compile(r"^accident_(\d+)\.csv\.bz2$")

PathLike = Union[str, Path]


@dataclass
class YearBatch:
    """
    Result of a multi-year load.

    ``records`` has one slot per requested year, in request order; a slot
    is ``None`` when that year could not be loaded.  ``warnings`` holds
    one message per failed year, in the same order.
    """
    records: List[Optional[pd.DataFrame]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def loaded(self) -> List[pd.DataFrame]:
        return [r for r in self.records if r is not None]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year: Any) -> str:
    """
    Build the data file name for a year.

    Args:
        year: Integer or integer-like string, e.g. ``2013`` or ``"2013"``.

    Returns:
        ``'accident_<year>.csv.bz2'``.

    Raises:
        ValueError: If *year* cannot be coerced to an integer.

    Example::

        >>> make_filename("2013")
        'accident_2013.csv.bz2'
    """
    return _FILENAME_TEMPLATE.format(year=coerce_int(year, label="year"))


def fars_read(filename: PathLike, data_dir: Optional[PathLike] = None) -> pd.DataFrame:
    """
    Read one accident file into a DataFrame.

    The file is parsed fresh on every call.  Compression is inferred from
    the extension; text is decoded as UTF-8, falling back to latin-1.

    Args:
        filename: File name relative to the data directory.
        data_dir: Directory holding the data files.  Defaults to
            ``DEFAULT_DATA_DIR``.

    Returns:
        The parsed table, unmodified.

    Raises:
        FileNotFoundError: If the resolved path does not exist.  The
            message carries the resolved path.
    """
    path = resolve_data_dir(data_dir) / filename
    if not path.exists():
        raise FileNotFoundError(f"file '{path}' does not exist")

    # low_memory=False: single-pass parse, no DtypeWarning on the
    # mixed-type columns some FARS years carry.  Older FARS files may
    # contain non-UTF-8 bytes; try UTF-8 first, then latin-1.
    try:
        df = pd.read_csv(path, low_memory=False, encoding="utf-8")
    except UnicodeDecodeError:
        df = pd.read_csv(path, low_memory=False, encoding="latin-1")
    log.debug("Read %d rows from %s", len(df), path.name, extra={"path": str(path)})
    return df


def load_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> YearBatch:
    """
    Load Year-Month Records for several years, isolating failures.

    Args:
        years: Years to load, in the order the output should follow.
        data_dir: Directory holding the data files.

    Returns:
        ``YearBatch`` with one record (or ``None``) per requested year and
        the warning messages for the years that failed.
    """
    batch = YearBatch()

    for year in years:
        try:
            filename = make_filename(year)
            df = fars_read(filename, data_dir=data_dir)
            record = to_year_month(df, coerce_int(year, label="year"))
        except (OSError, ValueError, KeyError) as exc:
            message = f"invalid year: {year}"
            log.warning(message, extra={"year": str(year), "error": str(exc)})
            batch.records.append(None)
            batch.warnings.append(message)
            continue

        batch.records.append(record)

    return batch


def fars_read_years(
    years: Iterable[Any],
    data_dir: Optional[PathLike] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Read Year-Month Records for several years.

    Thin wrapper around ``load_years`` that returns only the records.
    Failed years are logged at WARNING and appear as ``None``.

    Args:
        years: Sequence of years.
        data_dir: Directory holding the data files.

    Returns:
        List the same length as *years*; each entry is a DataFrame with
        columns ``[MONTH, year]`` or ``None``.

    Example::

        >>> recs = fars_read_years([2013, 9999])
        >>> [r is None for r in recs]
        [False, True]
    """
    return load_years(years, data_dir=data_dir).records


def get_available_years(data_dir: Optional[PathLike] = None) -> List[int]:
    """
    Return the years that have a data file in the data directory.

    Args:
        data_dir: Directory to scan.

    Returns:
        Sorted list of years.  Empty list if the directory does not exist
        or holds no matching files.
    """
    directory = resolve_data_dir(data_dir)
    if not directory.is_dir():
        return []

    years = set()
    for path in directory.iterdir():
        match = _FILENAME_RE.match(path.name)
        if match and path.is_file():
            years.add(int(match.group(1)))
    return sorted(years)


def resolve_data_dir(data_dir: Optional[PathLike] = None) -> Path:
    """Return *data_dir* as a Path, defaulting to the packaged ``extdata/``."""
    if data_dir is None:
        return DEFAULT_DATA_DIR
    return Path(data_dir)
