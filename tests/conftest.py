"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pandas as pd
import pytest

from safeparam.options import (
    ENV_DATE_FORMATS,
    ENV_INTEGER_STRATEGY,
    ENV_MISSING_TOKENS,
    ENV_TIMEZONE,
    ENV_TRIM_WHITESPACE,
)

_SAFEPARAM_ENV_VARS = (
    ENV_DATE_FORMATS,
    ENV_INTEGER_STRATEGY,
    ENV_MISSING_TOKENS,
    ENV_TIMEZONE,
    ENV_TRIM_WHITESPACE,
)


@pytest.fixture(autouse=True)
def clean_safeparam_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep SAFEPARAM_* variables from the host environment out of tests."""
    for name in _SAFEPARAM_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def params() -> pd.DataFrame:
    """One-row parameter table as handed over by a reporting host."""
    return pd.DataFrame(
        {
            "StartDate": ["2024-01-01"],
            "TopN": ["10"],
            "Region": ["North"],
            "Debug": ["true"],
            "Threshold": [" 2.5 "],
            "Blank": [""],
        }
    )
