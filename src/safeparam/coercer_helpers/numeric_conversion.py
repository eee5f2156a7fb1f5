"""Conversion of normalized values to numbers and integers.

Order of operations is fixed: parse, absolute value (``make_positive``),
integer strategy (integer targets only), clamp into ``[min_val, max_val]``,
then the final ``int``/``float`` representation.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Callable, Dict

from ..exceptions import CoercionError
from ..options import CoercionOptions, IntegerStrategy, Target
from .value_types import is_boolean, is_real_number

Number = int | float

_STRATEGIES: Dict[IntegerStrategy, Callable[[Number], int]] = {
    # Built-in round() rounds halves to even: 2.5 -> 2, 3.5 -> 4.
    IntegerStrategy.ROUND: round,
    IntegerStrategy.FLOOR: math.floor,
    IntegerStrategy.CEILING: math.ceil,
    IntegerStrategy.TRUNCATE: math.trunc,
}


def parse_number(value: Any, target: str) -> Number:
    """
    Parse a boolean, native number, or numeric text into ``int`` or ``float``.

    Integral inputs stay ``int`` so large integers keep their precision.

    Raises:
        CoercionError: If the value is not numeric or is NaN
    """
    if is_boolean(value):
        return int(bool(value))
    if isinstance(value, numbers.Integral):
        return int(value)
    if is_real_number(value):
        number = float(value)
    elif isinstance(value, str):
        number = _parse_numeric_text(value, target)
    else:
        raise CoercionError.unsupported_type(value, target)
    if math.isnan(number):
        raise CoercionError.non_finite(value, target)
    return number


def _parse_numeric_text(text: str, target: str) -> float:
    # float() also accepts digit-group underscores ("1_000"); those are not numbers here.
    if "_" in text:
        raise CoercionError.unparseable(text, target)
    try:
        return float(text)
    except ValueError as exc:
        raise CoercionError.unparseable(text, target) from exc


def apply_integer_strategy(number: Number, strategy: IntegerStrategy) -> int:
    """Round ``number`` to an integer using ``strategy``."""
    if isinstance(number, float) and not math.isfinite(number):
        raise CoercionError.non_finite(number, Target.INTEGER.value)
    return int(_STRATEGIES[strategy](number))


def clamp(number: Number, min_val: float, max_val: float) -> Number:
    """Clamp ``number`` into the inclusive interval; values already inside keep their type."""
    if number < min_val:
        return min_val
    if number > max_val:
        return max_val
    return number


def convert_number(value: Any, options: CoercionOptions) -> Number:
    """
    Convert ``value`` for ``Target.NUMBER`` or ``Target.INTEGER``.

    Returns:
        ``int`` for integer targets, ``float`` for number targets

    Raises:
        CoercionError: If the value cannot be parsed or the result has no integer form
    """
    target = options.target
    number = parse_number(value, target.value)
    if options.make_positive:
        number = abs(number)
    if target is Target.INTEGER:
        number = apply_integer_strategy(number, options.integer_strategy)
    number = clamp(number, options.min_val, options.max_val)
    if target is Target.INTEGER:
        if isinstance(number, float) and not math.isfinite(number):
            raise CoercionError.out_of_range(number, target.value)
        # Fractional clamp bounds truncate toward zero.
        return int(number)
    return float(number)


__all__ = ["apply_integer_strategy", "clamp", "convert_number", "parse_number"]
