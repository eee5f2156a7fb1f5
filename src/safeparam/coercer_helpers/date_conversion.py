"""Conversion of normalized values to calendar dates."""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta
from typing import Any, Iterable

from ..exceptions import CoercionError
from ..options import CoercionOptions
from .timezones import to_timezone
from .value_types import as_python_datetime, is_boolean, is_datetime_like, is_real_number

EPOCH_DATE = date(1970, 1, 1)

_UNCONVERTED_DATA = "unconverted data remains: "


def _parse_leading(text: str, fmt: str) -> date:
    try:
        return datetime.strptime(text, fmt).date()
    except ValueError as exc:
        message = str(exc)
        if not message.startswith(_UNCONVERTED_DATA):
            raise
        remainder = message[len(_UNCONVERTED_DATA) :]
    # The pattern matched a prefix; parse just that prefix.
    return datetime.strptime(text[: len(text) - len(remainder)], fmt).date()


def parse_date_text(text: str, formats: Iterable[str]) -> date:
    """
    Parse ``text`` with each ``strptime`` pattern in turn.

    A pattern only has to match the start of the text; anything after the
    matched date (a time of day, for example) is ignored.

    Returns:
        The first valid calendar date

    Raises:
        CoercionError: If no pattern matches
    """
    for fmt in formats:
        try:
            return _parse_leading(text, fmt)
        except ValueError:  # policy_guard: allow-silent-handler
            continue
    raise CoercionError.unparseable(text, "date")


def date_from_days(days: Any) -> date:
    """Interpret ``days`` as an offset from 1970-01-01; fractions round toward negative infinity."""
    number = float(days)
    if not math.isfinite(number):
        raise CoercionError.non_finite(days, "date")
    try:
        return EPOCH_DATE + timedelta(days=math.floor(number))
    except OverflowError as exc:
        raise CoercionError.out_of_range(days, "date") from exc


def convert_date(value: Any, options: CoercionOptions) -> date:
    """
    Convert ``value`` to ``datetime.date``.

    Date-times contribute their calendar date in ``options.timezone``; text is
    tried against ``options.date_formats``; numbers count days from the epoch.

    Raises:
        CoercionError: If no conversion applies
    """
    if is_boolean(value):
        raise CoercionError.unsupported_type(value, options.target.value)
    if is_datetime_like(value):
        return to_timezone(as_python_datetime(value), options.tzinfo).date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date_text(value, options.date_formats)
    if is_real_number(value):
        return date_from_days(value)
    raise CoercionError.unsupported_type(value, options.target.value)


__all__ = ["EPOCH_DATE", "convert_date", "date_from_days", "parse_date_text"]
