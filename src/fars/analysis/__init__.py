"""
FARS Analysis Package (Functional Core)

This package contains pure transformation functions with no I/O.
All functions accept DataFrames and return transformed data.

Modules:
- summary:     Year-month reduction and monthly count pivot
- coordinates: State selection and coordinate sentinel cleaning
"""

from .summary import (
    to_year_month,
    summarize_year_months,
)

from .coordinates import (
    InvalidStateError,
    LATITUDE_SENTINEL,
    LONGITUDE_SENTINEL,
    select_state,
    clean_coordinates,
    plottable_points,
    coordinate_bounds,
)

__all__ = [
    # Summary
    'to_year_month',
    'summarize_year_months',
    # Coordinates
    'InvalidStateError',
    'LATITUDE_SENTINEL',
    'LONGITUDE_SENTINEL',
    'select_state',
    'clean_coordinates',
    'plottable_points',
    'coordinate_bounds',
]
