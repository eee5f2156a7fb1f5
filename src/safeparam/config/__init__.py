"""Environment-backed configuration helpers."""

from .errors import ConfigurationError
from .runtime import env_bool, env_list, env_str

__all__ = [
    "ConfigurationError",
    "env_bool",
    "env_list",
    "env_str",
]
