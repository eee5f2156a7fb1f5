from __future__ import annotations

"""Exception types for configuration handling."""


class ConfigurationError(RuntimeError):
    """Raised when coercion options or environment values are missing or malformed."""

    @classmethod
    def invalid_value(cls, param_name: str, value, reason: str = "") -> "ConfigurationError":
        """Create error for invalid value."""
        msg = f"Invalid value for {param_name}: {value!r}"
        if reason:
            msg += f". {reason}"
        return cls(msg)

    @classmethod
    def invalid_timezone(cls, tz_name: str) -> "ConfigurationError":
        """Create error for an unknown timezone identifier."""
        return cls(f"Unknown timezone '{tz_name}'")

    @classmethod
    def invalid_bounds(cls, min_val: float, max_val: float) -> "ConfigurationError":
        """Create error for an empty clamp interval."""
        return cls(f"min_val must not exceed max_val (received min_val={min_val!r}, max_val={max_val!r})")

    @classmethod
    def default_type_mismatch(cls, target: str, default, expected: str) -> "ConfigurationError":
        """Create error for a default that does not match the target type."""
        return cls(f"Default for target '{target}' must be {expected}, got {type(default).__name__}: {default!r}")


__all__ = ["ConfigurationError"]
