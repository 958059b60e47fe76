"""
FARS - Fatality Analysis Reporting System toolkit

Loads yearly FARS accident files, summarizes monthly accident counts
across years, and maps accident locations for a single state, using the
Functional Core, Imperative Shell layout.

Structure:
- data/     : Imperative Shell (file lookup and reading)
- analysis/ : Functional Core (pure DataFrame transformations)
- plotting/ : (figure builders)
- reports/  : public operations tying the layers together
- extdata/  : accident_<year>.csv.bz2 sample files
"""

from .data.reader import (
    make_filename,
    fars_read,
    fars_read_years,
    get_available_years,
)
from .analysis.coordinates import InvalidStateError
from .reports.generators import (
    fars_summarize_years,
    fars_map_state,
)

__version__ = "0.1.0"

__all__ = [
    'make_filename',
    'fars_read',
    'fars_read_years',
    'get_available_years',
    'fars_summarize_years',
    'fars_map_state',
    'InvalidStateError',
]
