"""Conversion of normalized values to timezone-aware date-times."""

from __future__ import annotations

import logging
import math
from datetime import date, datetime, timezone
from typing import Any, Iterable

from dateutil import parser as dateutil_parser

from ..exceptions import CoercionError
from ..options import CoercionOptions
from .timezones import localize, start_of_day
from .value_types import as_python_datetime, is_boolean, is_datetime_like, is_real_number

logger = logging.getLogger(__name__)

BUILTIN_DATETIME_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S",
    "%m/%d/%Y %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%d-%b-%Y %H:%M:%S",
)

# Two unrelated defaults: a best-effort parse is kept only when the text fixes
# the calendar date itself, so nothing is filled in from a default or the clock.
_BEST_EFFORT_DEFAULTS = (datetime(1970, 1, 1), datetime(1971, 2, 2))


def _parse_with_formats(text: str, formats: Iterable[str]) -> datetime | None:
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:  # policy_guard: allow-silent-handler
            continue
    return None


def _parse_best_effort(text: str) -> datetime | None:
    try:
        first, second = (dateutil_parser.parse(text, default=default) for default in _BEST_EFFORT_DEFAULTS)
    except (ValueError, OverflowError) as exc:  # policy_guard: allow-silent-handler
        logger.debug("Best-effort date-time parse failed for %r: %s", text, exc)
        return None
    if first.date() != second.date():
        logger.debug("Best-effort date-time parse of %r has no complete date", text)
        return None
    return first


def parse_datetime_text(text: str, options: CoercionOptions) -> datetime:
    """
    Parse ``text`` into an aware datetime.

    Tries the built-in date-time patterns, then ``options.date_formats``, then a
    single best-effort parse. Naive results are interpreted in
    ``options.timezone``; an explicit offset in the text is kept.

    Raises:
        CoercionError: If every attempt fails
    """
    parsed = _parse_with_formats(text, (*BUILTIN_DATETIME_FORMATS, *options.date_formats))
    if parsed is None:
        parsed = _parse_best_effort(text)
    if parsed is None:
        raise CoercionError.unparseable(text, options.target.value)
    if parsed.tzinfo is None:
        return localize(parsed, options.tzinfo)
    return parsed


def datetime_from_seconds(seconds: Any, options: CoercionOptions) -> datetime:
    """Interpret ``seconds`` as an offset from the Unix epoch, expressed in ``options.timezone``."""
    number = float(seconds)
    if not math.isfinite(number):
        raise CoercionError.non_finite(seconds, options.target.value)
    try:
        instant = datetime.fromtimestamp(number, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise CoercionError.out_of_range(seconds, options.target.value) from exc
    return instant.astimezone(options.tzinfo)


def convert_datetime(value: Any, options: CoercionOptions) -> datetime:
    """
    Convert ``value`` to an aware ``datetime.datetime``.

    Aware date-times pass through unchanged and naive ones are localized to
    ``options.timezone``. Dates expand to local midnight and numbers count
    seconds from the epoch.

    Raises:
        CoercionError: If no conversion applies
    """
    if is_boolean(value):
        raise CoercionError.unsupported_type(value, options.target.value)
    if is_datetime_like(value):
        moment = as_python_datetime(value)
        if moment.tzinfo is None:
            return localize(moment, options.tzinfo)
        return moment
    if isinstance(value, date):
        return start_of_day(value, options.tzinfo)
    if isinstance(value, str):
        return parse_datetime_text(value, options)
    if is_real_number(value):
        return datetime_from_seconds(value, options)
    raise CoercionError.unsupported_type(value, options.target.value)


__all__ = ["BUILTIN_DATETIME_FORMATS", "convert_datetime", "datetime_from_seconds", "parse_datetime_text"]
