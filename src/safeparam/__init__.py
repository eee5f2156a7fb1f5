"""Safe coercion of loosely-typed report parameters to typed values."""

from .coercer import coerce, coerce_cell, fallback_value, safe_param
from .config import ConfigurationError
from .exceptions import ApplicationError, CoercionError
from .extraction import ExtractionResult, extract_cell
from .missing import TypedMissing, is_missing, typed_missing
from .options import (
    DEFAULT_DATE_FORMATS,
    DEFAULT_MISSING_TOKENS,
    DEFAULT_TIMEZONE,
    CoercionOptions,
    IntegerStrategy,
    Target,
)

__all__ = [
    "ApplicationError",
    "CoercionError",
    "CoercionOptions",
    "ConfigurationError",
    "DEFAULT_DATE_FORMATS",
    "DEFAULT_MISSING_TOKENS",
    "DEFAULT_TIMEZONE",
    "ExtractionResult",
    "IntegerStrategy",
    "Target",
    "TypedMissing",
    "coerce",
    "coerce_cell",
    "extract_cell",
    "fallback_value",
    "is_missing",
    "safe_param",
    "typed_missing",
]
