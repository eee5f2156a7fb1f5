"""Exception classes for the safeparam package.

Exception classes support two patterns:
1. No-argument raise: raise CoercionError()
2. Contextual attributes: err = CoercionError(value="abc", target="number"); raise err

``CoercionError`` is an internal signal. Conversion helpers raise it and the
coercer converts it into the fallback value, so it never reaches callers of
``coerce``.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all safeparam errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class CoercionError(ApplicationError, ValueError):
    """Value could not be converted to the requested target type."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Value could not be converted to the requested target type"
        super().__init__(message, **kwargs)

    @classmethod
    def unparseable(cls, value: object, target: str) -> "CoercionError":
        return cls(f"Cannot parse {value!r} as {target}", value=value, target=target)

    @classmethod
    def unsupported_type(cls, value: object, target: str) -> "CoercionError":
        return cls(
            f"Unsupported type for {target} coercion: {type(value).__name__}",
            value=value,
            target=target,
        )

    @classmethod
    def non_finite(cls, value: object, target: str) -> "CoercionError":
        return cls(f"Non-finite value cannot become {target}: {value!r}", value=value, target=target)

    @classmethod
    def out_of_range(cls, value: object, target: str) -> "CoercionError":
        return cls(f"Value {value!r} is outside the representable {target} range", value=value, target=target)


__all__ = ["ApplicationError", "CoercionError"]
