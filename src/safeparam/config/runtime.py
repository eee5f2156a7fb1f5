"""Environment lookups behind ``CoercionOptions.from_env``.

Every helper returns ``or_value`` when the variable is unset, so the
environment only ever overrides the built-in option defaults.
"""

from __future__ import annotations

import os
from typing import Sequence

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}


def env_str(name: str, or_value: str | None = None) -> str | None:
    """Fetch a stripped string; blank values count as unset."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return or_value
    return raw.strip()


def env_bool(name: str, or_value: bool | None = None) -> bool | None:
    """Fetch a flag such as ``SAFEPARAM_TRIM_WHITESPACE``."""
    raw = env_str(name)
    if raw is None:
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_value(
        name, raw, f"Expected a boolean (allowed: {sorted(_TRUE_VALUES | _FALSE_VALUES)})"
    )


def env_list(
    name: str,
    *,
    or_value: Sequence[str],
    separator: str,
    verbatim: bool = False,
) -> tuple[str, ...]:
    """
    Split a delimited variable into a tuple without duplicates.

    Args:
        name: Environment variable to read
        or_value: Items used when the variable is unset or yields no items
        separator: Item delimiter
        verbatim: Keep items exactly as written, including blank ones. A
            missing-token list needs this to declare the empty string.

    Returns:
        Items in their first-seen order
    """
    raw = os.getenv(name)
    if raw is None:
        return tuple(or_value)

    items = raw.split(separator)
    if not verbatim:
        items = [item.strip() for item in items if item.strip()]
    if not items:
        return tuple(or_value)
    return tuple(dict.fromkeys(items))


__all__ = ["env_bool", "env_list", "env_str"]
