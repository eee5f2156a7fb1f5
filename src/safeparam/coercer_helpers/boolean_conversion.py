"""Conversion of normalized values to booleans."""

from __future__ import annotations

from typing import Any

from ..exceptions import CoercionError
from ..options import CoercionOptions
from .value_types import is_boolean, is_real_number

TRUE_TOKENS = frozenset({"true", "t", "yes", "y", "1"})
FALSE_TOKENS = frozenset({"false", "f", "no", "n", "0"})


def convert_boolean(value: Any, options: CoercionOptions) -> bool:
    """
    Convert ``value`` to ``bool``.

    Booleans pass through, numbers are True when non-zero, and text is matched
    case-insensitively against the true/false token sets. Token matching always
    strips whitespace, independent of ``options.trim_whitespace``.

    Raises:
        CoercionError: For unknown tokens and unsupported types
    """
    if is_boolean(value):
        return bool(value)
    if is_real_number(value):
        return bool(value != 0)
    if isinstance(value, str):
        token = value.strip().lower()
        if token in TRUE_TOKENS:
            return True
        if token in FALSE_TOKENS:
            return False
        raise CoercionError.unparseable(value, options.target.value)
    raise CoercionError.unsupported_type(value, options.target.value)


__all__ = ["FALSE_TOKENS", "TRUE_TOKENS", "convert_boolean"]
