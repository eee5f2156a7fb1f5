"""
Safe extraction and coercion of report parameters.

The pipeline runs in a fixed order and every stage can short-circuit to the
same fallback: the caller's default when one was given, otherwise the
``TypedMissing`` sentinel for the target.

1. Extraction: read the cell from a one-row parameter table (tables only)
2. Normalization: labeled values to text, whitespace trimming, missing tokens
3. Missing check: native missing markers and substituted tokens
4. Conversion: one helper per target type

Values are only ever converted, never spliced into script text.

Usage:
    from safeparam import safe_param

    params = pd.DataFrame({"StartDate": ["2024-01-01"], "TopN": ["10"]})
    start = safe_param(params, "StartDate", target="date")
    top_n = safe_param(params, "TopN", target="integer", default=5, min_val=1)
    safe_param("42.7", target="integer", integer_strategy="floor")  # 42
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Dict, Hashable, Iterable, Optional

from .coercer_helpers.boolean_conversion import convert_boolean
from .coercer_helpers.date_conversion import convert_date
from .coercer_helpers.datetime_conversion import convert_datetime
from .coercer_helpers.numeric_conversion import convert_number
from .coercer_helpers.text_conversion import convert_text
from .exceptions import CoercionError
from .extraction import extract_cell, is_table
from .missing import is_missing, typed_missing
from .normalization import normalize_value
from .options import (
    DEFAULT_DATE_FORMATS,
    DEFAULT_MISSING_TOKENS,
    DEFAULT_TIMEZONE,
    CoercionOptions,
    IntegerStrategy,
    Target,
)

logger = logging.getLogger(__name__)

_CONVERTERS: Dict[Target, Callable[[Any, CoercionOptions], Any]] = {
    Target.TEXT: convert_text,
    Target.INTEGER: convert_number,
    Target.NUMBER: convert_number,
    Target.BOOLEAN: convert_boolean,
    Target.DATE: convert_date,
    Target.DATETIME: convert_datetime,
}

# Errors a conversion may raise for bad data; all resolve to the fallback value.
_RECOVERABLE_ERRORS = (CoercionError, ValueError, TypeError, OverflowError, ArithmeticError)


def fallback_value(options: CoercionOptions) -> Any:
    """Return the caller's default, or the typed missing sentinel when there is none."""
    if options.default is not None:
        return options.default
    return typed_missing(options.target)


def _as_options(options: CoercionOptions | Target | str) -> CoercionOptions:
    if isinstance(options, CoercionOptions):
        return options
    return CoercionOptions(target=options)


def _coerce_value(raw: Any, options: CoercionOptions) -> Any:
    value = normalize_value(raw, options)
    if is_missing(value):
        logger.debug("Missing value %r for target %s", raw, options.target.value)
        return fallback_value(options)
    return _CONVERTERS[options.target](value, options)


def coerce(raw: Any, options: CoercionOptions | Target | str) -> Any:
    """
    Coerce a bare scalar to the options' target type.

    Args:
        raw: Scalar value (text, number, boolean, date, date-time, labeled or missing)
        options: ``CoercionOptions``, or just a target for default options

    Returns:
        A value of the target type, the configured default, or
        ``TypedMissing`` for the target. Never raises for bad data.
    """
    options = _as_options(options)
    try:
        return _coerce_value(raw, options)
    except _RECOVERABLE_ERRORS as exc:  # policy_guard: allow-silent-handler
        logger.debug("Falling back for target %s: %s", options.target.value, exc)
        return fallback_value(options)


def coerce_cell(
    source: Any,
    column: Optional[Hashable],
    row: int,
    options: CoercionOptions | Target | str,
) -> Any:
    """
    Extract one cell from a parameter table and coerce it.

    An absent column or out-of-range row is handled exactly like a missing value.
    """
    options = _as_options(options)
    extracted = extract_cell(source, column, row)
    if not extracted.found:
        logger.debug("Parameter %r (row %r) unavailable for target %s", column, row, options.target.value)
        return fallback_value(options)
    return coerce(extracted.value, options)


def safe_param(
    source: Any,
    column: Optional[Hashable] = None,
    row: int = 0,
    *,
    target: Target | str,
    default: Any = None,
    integer_strategy: IntegerStrategy | str = IntegerStrategy.ROUND,
    make_positive: bool = False,
    min_val: float = -math.inf,
    max_val: float = math.inf,
    trim_whitespace: bool = True,
    missing_tokens: Iterable[str] = DEFAULT_MISSING_TOKENS,
    date_formats: Iterable[str] = DEFAULT_DATE_FORMATS,
    timezone: str = DEFAULT_TIMEZONE,
) -> Any:
    """
    Safely extract and coerce a value from a parameter table or a bare scalar.

    Args:
        source: ``pandas.DataFrame`` / column mapping (the parameter table) or a scalar.
            For scalars ``column`` and ``row`` are ignored.
        column: Column to read when ``source`` is a table
        row: Zero-based row to read (parameter tables normally have one row)
        target: One of ``text``, ``integer``, ``number``, ``boolean``, ``date``,
            ``datetime`` (``character``, ``numeric`` and ``logical`` are accepted aliases)
        default: Returned when the value is missing or cannot be coerced; ``None``
            returns ``TypedMissing`` for the target instead
        integer_strategy: ``round`` (half to even), ``floor``, ``ceiling`` or ``truncate``
        make_positive: Take the absolute value before clamping (numeric targets)
        min_val: Inclusive lower bound (numeric targets)
        max_val: Inclusive upper bound (numeric targets)
        trim_whitespace: Strip surrounding whitespace from text values
        missing_tokens: Text values treated as missing
        date_formats: ``strptime`` patterns tried in order for dates
        timezone: Timezone for date-time targets and date/date-time conversion

    Returns:
        A value of the requested type, ``default``, or ``TypedMissing``

    Raises:
        ConfigurationError: If the options themselves are invalid
    """
    options = CoercionOptions(
        target=target,
        default=default,
        integer_strategy=integer_strategy,
        make_positive=make_positive,
        min_val=min_val,
        max_val=max_val,
        trim_whitespace=trim_whitespace,
        missing_tokens=missing_tokens,
        date_formats=date_formats,
        timezone=timezone,
    )
    if is_table(source):
        return coerce_cell(source, column, row, options)
    return coerce(source, options)


__all__ = ["coerce", "coerce_cell", "fallback_value", "safe_param"]
