"""
Coercion options: target types, integer strategies and the per-call option bundle.

``CoercionOptions`` validates everything up front so the coercion pipeline
itself never has to reject its configuration:

    options = CoercionOptions(target=Target.INTEGER, default=5, min_val=1)
    options = CoercionOptions.from_env("datetime")  # honours SAFEPARAM_* variables
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from enum import Enum
from typing import Any, Iterable, Optional

import numpy as np

from .coercer_helpers.timezones import resolve_timezone, validate_timezone
from .config import ConfigurationError, env_bool, env_list, env_str

logger = logging.getLogger(__name__)

DEFAULT_MISSING_TOKENS = frozenset({"", "NA", "NaN", "null", "Null", "NULL"})
DEFAULT_DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%d-%b-%Y", "%Y/%m/%d")
DEFAULT_TIMEZONE = "UTC"

ENV_TIMEZONE = "SAFEPARAM_TIMEZONE"
ENV_TRIM_WHITESPACE = "SAFEPARAM_TRIM_WHITESPACE"
ENV_MISSING_TOKENS = "SAFEPARAM_MISSING_TOKENS"
ENV_DATE_FORMATS = "SAFEPARAM_DATE_FORMATS"
ENV_INTEGER_STRATEGY = "SAFEPARAM_INTEGER_STRATEGY"
ENV_LIST_SEPARATOR = "|"


class Target(Enum):
    """Type a raw value is coerced to."""

    TEXT = "text"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"

    @classmethod
    def parse(cls, value: "Target | str") -> "Target":
        """Resolve a target from the enum, its value, or a legacy alias."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            key = _TARGET_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        raise ConfigurationError.invalid_value("target", value, f"Expected one of {[m.value for m in cls]}")

    @property
    def value_type(self) -> type:
        return _TARGET_VALUE_TYPES[self]


_TARGET_ALIASES = {
    "character": "text",
    "string": "text",
    "str": "text",
    "numeric": "number",
    "float": "number",
    "double": "number",
    "int": "integer",
    "logical": "boolean",
    "bool": "boolean",
}

_TARGET_VALUE_TYPES = {
    Target.TEXT: str,
    Target.INTEGER: int,
    Target.NUMBER: float,
    Target.BOOLEAN: bool,
    Target.DATE: date,
    Target.DATETIME: datetime,
}


class IntegerStrategy(Enum):
    """How a fractional number becomes an integer."""

    ROUND = "round"
    FLOOR = "floor"
    CEILING = "ceiling"
    TRUNCATE = "truncate"

    @classmethod
    def parse(cls, value: "IntegerStrategy | str") -> "IntegerStrategy":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        raise ConfigurationError.invalid_value(
            "integer_strategy", value, f"Expected one of {[m.value for m in cls]}"
        )


@dataclass(frozen=True)
class CoercionOptions:
    """Immutable bundle of options for a single coercion.

    Attributes:
        target: Type to coerce to. Required.
        default: Value returned on any failure; ``None`` selects the typed missing sentinel.
        integer_strategy: Rounding applied to integer targets (round half to even by default).
        make_positive: Take the absolute value before clamping (numeric targets only).
        min_val: Inclusive lower clamp bound (numeric targets only).
        max_val: Inclusive upper clamp bound (numeric targets only).
        trim_whitespace: Strip leading/trailing whitespace from text values.
        missing_tokens: Exact text values treated as missing.
        date_formats: ``strptime`` patterns tried in order for date parsing.
        timezone: IANA timezone used for date-time interpretation.
    """

    target: Target
    default: Any = None
    integer_strategy: IntegerStrategy = IntegerStrategy.ROUND
    make_positive: bool = False
    min_val: float = -math.inf
    max_val: float = math.inf
    trim_whitespace: bool = True
    missing_tokens: frozenset = DEFAULT_MISSING_TOKENS
    date_formats: tuple = DEFAULT_DATE_FORMATS
    timezone: str = DEFAULT_TIMEZONE
    _tzinfo: tzinfo = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        target = Target.parse(self.target)
        object.__setattr__(self, "target", target)
        object.__setattr__(self, "integer_strategy", IntegerStrategy.parse(self.integer_strategy))
        object.__setattr__(self, "make_positive", bool(self.make_positive))
        object.__setattr__(self, "trim_whitespace", bool(self.trim_whitespace))
        object.__setattr__(self, "missing_tokens", frozenset(_as_strings("missing_tokens", self.missing_tokens)))
        object.__setattr__(self, "date_formats", tuple(_as_strings("date_formats", self.date_formats)))

        min_val = _as_bound("min_val", self.min_val)
        max_val = _as_bound("max_val", self.max_val)
        if min_val > max_val:
            raise ConfigurationError.invalid_bounds(min_val, max_val)
        object.__setattr__(self, "min_val", min_val)
        object.__setattr__(self, "max_val", max_val)

        if not isinstance(self.timezone, str) or not validate_timezone(self.timezone):
            raise ConfigurationError.invalid_timezone(str(self.timezone))
        object.__setattr__(self, "_tzinfo", resolve_timezone(self.timezone))

        if self.default is not None:
            object.__setattr__(self, "default", _check_default(target, self.default))

    @property
    def tzinfo(self) -> tzinfo:
        """Resolved pytz timezone for :attr:`timezone`."""
        return self._tzinfo

    @classmethod
    def from_env(cls, target: Target | str, **overrides: Any) -> "CoercionOptions":
        """
        Build options whose defaults come from ``SAFEPARAM_*`` environment variables.

        Explicit keyword ``overrides`` win over the environment. List variables
        use ``|`` as separator; ``SAFEPARAM_MISSING_TOKENS`` keeps items verbatim
        so an empty token can be declared with a leading or doubled separator.

        Raises:
            ConfigurationError: If an environment value is malformed
        """
        settings: dict[str, Any] = {
            "timezone": env_str(ENV_TIMEZONE, or_value=DEFAULT_TIMEZONE),
            "trim_whitespace": env_bool(ENV_TRIM_WHITESPACE, or_value=True),
            "integer_strategy": env_str(ENV_INTEGER_STRATEGY, or_value=IntegerStrategy.ROUND.value),
            "missing_tokens": env_list(
                ENV_MISSING_TOKENS,
                or_value=tuple(DEFAULT_MISSING_TOKENS),
                separator=ENV_LIST_SEPARATOR,
                verbatim=True,
            ),
            "date_formats": env_list(
                ENV_DATE_FORMATS,
                or_value=DEFAULT_DATE_FORMATS,
                separator=ENV_LIST_SEPARATOR,
            ),
        }
        settings.update(overrides)
        logger.debug("Building coercion options for %s from environment", target)
        return cls(target=target, **settings)


def _as_strings(field_name: str, values: Iterable[str] | str) -> list[str]:
    if isinstance(values, str):
        values = (values,)
    try:
        items = list(values)
    except TypeError as exc:
        raise ConfigurationError.invalid_value(field_name, values, "Expected a collection of strings") from exc
    for item in items:
        if not isinstance(item, str):
            raise ConfigurationError.invalid_value(field_name, item, "Expected a string")
    return items


def _as_bound(field_name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError.invalid_value(field_name, value, "Expected a number")
    bound = float(value)
    if math.isnan(bound):
        raise ConfigurationError.invalid_value(field_name, value, "Bound cannot be NaN")
    return bound


def _check_default(target: Target, default: Any) -> Any:
    """Return ``default`` in the target's representation or raise ``ConfigurationError``."""
    from .missing import TypedMissing

    if isinstance(default, TypedMissing):
        if default.target is not target:
            raise ConfigurationError.default_type_mismatch(target.value, default, f"TypedMissing({target.value})")
        return default

    converted: Optional[Any] = None
    if target is Target.TEXT and isinstance(default, str):
        converted = str(default)
    elif target is Target.BOOLEAN and isinstance(default, (bool, np.bool_)):
        converted = bool(default)
    elif target is Target.INTEGER and isinstance(default, numbers.Integral) and not _is_boolean(default):
        converted = int(default)
    elif target is Target.NUMBER and isinstance(default, numbers.Real) and not _is_boolean(default):
        converted = float(default)
    elif target is Target.DATETIME and isinstance(default, datetime):
        converted = default
    elif target is Target.DATE and isinstance(default, date) and not isinstance(default, datetime):
        converted = default

    if converted is None:
        raise ConfigurationError.default_type_mismatch(target.value, default, target.value_type.__name__)
    return converted


def _is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


__all__ = [
    "CoercionOptions",
    "DEFAULT_DATE_FORMATS",
    "DEFAULT_MISSING_TOKENS",
    "DEFAULT_TIMEZONE",
    "IntegerStrategy",
    "Target",
]
