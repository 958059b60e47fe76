"""Centralized input coercion and column checks."""

import numbers
from typing import Any, Iterable

import pandas as pd


def coerce_int(value: Any, label: str = "value") -> int:
    """Coerce an integer-like value (int, integral float, numeric string).

    Integers and integer strings are converted exactly, at any size.
    Surrounding whitespace in strings is ignored, and ``"2013.0"`` or
    ``2013.0`` give ``2013``.  Booleans are rejected.

    Args:
        value: Value to coerce.
        label: Name used in the error message (e.g. ``'year'``).

    Returns:
        The value as a plain ``int``.

    Raises:
        ValueError: If *value* is not numeric or not integral.
    """
    error = ValueError(f"{label} must be integer-like, got {value!r}")

    if isinstance(value, bool):
        raise error
    if isinstance(value, numbers.Integral):
        return int(value)

    if isinstance(value, str):
        value = value.strip()
        try:
            return int(value)
        except ValueError:
            pass

    try:
        as_float = float(value)
    except (TypeError, ValueError):
        raise error from None

    if not as_float.is_integer():
        raise error
    return int(as_float)


def require_columns(df: pd.DataFrame, required: Iterable[str], name: str = "df") -> None:
    """
    Raise ValueError if any required columns are absent.

    Args:
        df: DataFrame to check.
        required: Column names that must be present.
        name: Name of the frame, used in the error message.

    Raises:
        ValueError: Listing the missing columns.
    """
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"{name} is missing required columns: {missing}")
