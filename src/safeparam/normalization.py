"""Normalization of raw values ahead of type conversion."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from .options import CoercionOptions

logger = logging.getLogger(__name__)


def label_to_text(value: Any) -> Any:
    """
    Convert labeled values to their plain-text label.

    Enum members become their string value (or their name when the value is
    not text), bytes are decoded as UTF-8, and ``str`` subclasses such as
    ``numpy.str_`` become plain ``str``. Anything else is returned unchanged.
    """
    if isinstance(value, Enum):
        return value.value if isinstance(value.value, str) else value.name
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", "ignore")
    if isinstance(value, str) and type(value) is not str:
        return str.__str__(value)
    return value


def normalize_value(value: Any, options: CoercionOptions) -> Any:
    """
    Apply labeled-to-text conversion, whitespace trimming and missing-token substitution.

    Returns ``None`` when a text value matches one of ``options.missing_tokens``
    after trimming. Non-text values are only touched by the labeled conversion.
    """
    value = label_to_text(value)
    if not isinstance(value, str):
        return value
    if options.trim_whitespace:
        value = value.strip()
    if value in options.missing_tokens:
        logger.debug("Text %r matches a missing token", value)
        return None
    return value


__all__ = ["label_to_text", "normalize_value"]
