"""
FARS Data Package (Imperative Shell)

This package handles all file I/O for the FARS toolkit.

Modules:
- reader: file name derivation, single-file and multi-year reading
"""

from .reader import (
    DEFAULT_DATA_DIR,
    YearBatch,
    make_filename,
    fars_read,
    fars_read_years,
    load_years,
    get_available_years,
    resolve_data_dir,
)

__all__ = [
    'DEFAULT_DATA_DIR',
    'YearBatch',
    'make_filename',
    'fars_read',
    'fars_read_years',
    'load_years',
    'get_available_years',
    'resolve_data_dir',
]
