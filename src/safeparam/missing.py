"""Typed missing values and native missing-value detection.

Every coercion target has exactly one ``TypedMissing`` sentinel. The coercer
returns it in place of a real value so a failed conversion still carries the
type that was asked for, unlike a bare ``None``.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict

import numpy as np
import pandas as pd

from .options import Target

logger = logging.getLogger(__name__)


class TypedMissing:
    """Absence of a value of one specific target type.

    Instances are singletons per target: use :meth:`for_target` to obtain one.
    They are falsy, hashable, and only equal to the sentinel of the same
    target.
    """

    __slots__ = ("_target",)

    _instances: Dict[Target, "TypedMissing"] = {}

    def __new__(cls, target: Target) -> "TypedMissing":
        target = Target.parse(target)
        existing = cls._instances.get(target)
        if existing is not None:
            return existing
        instance = super().__new__(cls)
        instance._target = target
        cls._instances[target] = instance
        return instance

    @classmethod
    def for_target(cls, target: Target | str) -> "TypedMissing":
        return cls(Target.parse(target))

    @property
    def target(self) -> Target:
        return self._target

    @property
    def value_type(self) -> type:
        """The Python type a present value for this target would have."""
        return self._target.value_type

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, TypedMissing) and other.target is self._target

    def __hash__(self) -> int:
        return hash(("TypedMissing", self._target.value))

    def __repr__(self) -> str:
        return f"TypedMissing({self._target.value})"

    def __reduce__(self):
        return (TypedMissing, (self._target,))


def typed_missing(target: Target | str) -> TypedMissing:
    """Return the missing sentinel for ``target``."""
    return TypedMissing.for_target(target)


def is_missing(value: Any) -> bool:
    """Return True when ``value`` is a native or typed missing marker.

    Recognises ``None``, ``TypedMissing``, float and Decimal NaN, ``pandas.NA``,
    ``pandas.NaT`` and ``numpy`` NaT/NaN scalars. Text is never considered
    missing here; missing tokens are matched during normalization.
    """
    if value is None or isinstance(value, TypedMissing):
        return True
    if isinstance(value, (str, bytes, bytearray, bool, np.bool_)):
        return False
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, (datetime, date, int)) and value is not pd.NaT:
        return False
    if not pd.api.types.is_scalar(value):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):  # policy_guard: allow-silent-handler
        logger.debug("Missing-value check not supported for %s", type(value).__name__)
        return False


__all__ = ["TypedMissing", "is_missing", "typed_missing"]
