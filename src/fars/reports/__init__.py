"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, summarizing and map rendering.
No analysis logic lives here — this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: fars_summarize_years() and fars_map_state().
"""

from .generators import (
    fars_summarize_years,
    fars_map_state,
)

__all__ = [
    'fars_summarize_years',
    'fars_map_state',
]
