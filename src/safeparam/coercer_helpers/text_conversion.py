"""Conversion of normalized values to text."""

from __future__ import annotations

import numbers
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from ..exceptions import CoercionError
from ..options import CoercionOptions
from .value_types import as_python_datetime, is_boolean, is_datetime_like

# Fifteen significant digits renders 42.0 as "42" and 0.1 + 0.2 as "0.3".
FLOAT_TEXT_FORMAT = ".15g"


def convert_text(value: Any, options: CoercionOptions) -> str:
    """Stringify ``value``; raises ``CoercionError`` if it has no text form."""
    if isinstance(value, str):
        return value
    if is_boolean(value):
        return str(bool(value))
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, numbers.Real):
        return format(float(value), FLOAT_TEXT_FORMAT)
    if is_datetime_like(value):
        return as_python_datetime(value).isoformat(sep=" ")
    if isinstance(value, date):
        return value.isoformat()
    try:
        return str(value)
    except (TypeError, ValueError, AttributeError, UnicodeError) as exc:
        raise CoercionError.unparseable(type(value).__name__, options.target.value) from exc


__all__ = ["convert_text"]
