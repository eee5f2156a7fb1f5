"""Type predicates shared across the conversion helpers."""

from __future__ import annotations

import numbers
from datetime import datetime
from decimal import Decimal
from typing import Any

import numpy as np
import pandas as pd


def is_boolean(value: Any) -> bool:
    """Return True for Python and numpy booleans."""
    return isinstance(value, (bool, np.bool_))


def is_real_number(value: Any) -> bool:
    """Return True for real numbers (including numpy scalars and Decimal), excluding booleans."""
    return isinstance(value, (numbers.Real, Decimal)) and not is_boolean(value)


def is_datetime_like(value: Any) -> bool:
    """Return True for values that carry both a date and a time of day."""
    return isinstance(value, (datetime, np.datetime64))


def as_python_datetime(value: Any) -> datetime:
    """Convert pandas and numpy timestamps to ``datetime.datetime``."""
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime(warn=False)
    if isinstance(value, np.datetime64):
        return pd.Timestamp(value).to_pydatetime(warn=False)
    return value


__all__ = ["as_python_datetime", "is_boolean", "is_datetime_like", "is_real_number"]
