"""
Cell extraction from one-row parameter tables.

A parameter table is either a ``pandas.DataFrame`` or a mapping of column
names to column values. Only three operations are needed: column existence,
row bounds, and reading a single cell. A failed lookup is reported through
``ExtractionResult.found`` and never raises.
"""

from __future__ import annotations

import logging
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Hashable

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of a cell lookup: ``value`` is only meaningful when ``found``."""

    found: bool
    value: Any = None

    @classmethod
    def missing(cls) -> "ExtractionResult":
        return cls(found=False)


def is_table(source: Any) -> bool:
    """Return True when ``source`` should be treated as a parameter table rather than a scalar."""
    return isinstance(source, (pd.DataFrame, Mapping))


def extract_cell(source: Any, column: Hashable | None, row: int = 0) -> ExtractionResult:
    """
    Read one cell from a parameter table.

    Args:
        source: ``pandas.DataFrame`` or mapping of column name to a sequence of values
        column: Column label to read
        row: Zero-based row position

    Returns:
        ExtractionResult with ``found=False`` when the column is absent or not
        a valid label, or the row is outside the table
    """
    if not _is_column_label(column) or not _is_row_index(row):
        logger.debug("Parameter lookup rejected: column=%r row=%r", column, row)
        return ExtractionResult.missing()
    if isinstance(source, pd.DataFrame):
        return _extract_from_frame(source, column, int(row))
    if isinstance(source, Mapping):
        return _extract_from_mapping(source, column, int(row))
    logger.debug("Unsupported parameter source type: %s", type(source).__name__)
    return ExtractionResult.missing()


def _is_column_label(column: Any) -> bool:
    if column is None:
        return False
    try:
        hash(column)
    except TypeError:  # policy_guard: allow-silent-handler
        return False
    return True


def _is_row_index(row: Any) -> bool:
    return isinstance(row, (numbers.Integral, np.integer)) and not isinstance(row, (bool, np.bool_))


def _extract_from_frame(frame: pd.DataFrame, column: Hashable, row: int) -> ExtractionResult:
    if column not in frame.columns:
        logger.debug("Column %r not present in parameter table", column)
        return ExtractionResult.missing()
    if not 0 <= row < len(frame.index):
        logger.debug("Row %d outside parameter table with %d rows", row, len(frame.index))
        return ExtractionResult.missing()
    series = frame[column]
    if isinstance(series, pd.DataFrame):
        # Duplicate column labels select a frame; take the first matching column.
        series = series.iloc[:, 0]
    return ExtractionResult(found=True, value=series.iloc[row])


def _extract_from_mapping(mapping: Mapping, column: Hashable, row: int) -> ExtractionResult:
    if column not in mapping:
        logger.debug("Column %r not present in parameter mapping", column)
        return ExtractionResult.missing()
    column_values = mapping[column]
    if isinstance(column_values, pd.Series):
        column_values = column_values.tolist()
    elif isinstance(column_values, np.ndarray):
        column_values = list(column_values) if column_values.ndim else [column_values[()]]
    elif isinstance(column_values, (str, bytes, bytearray)) or not isinstance(column_values, Sequence):
        # A bare scalar behaves as a single-row column.
        column_values = [column_values]
    if not 0 <= row < len(column_values):
        logger.debug("Row %d outside parameter column %r with %d rows", row, column, len(column_values))
        return ExtractionResult.missing()
    return ExtractionResult(found=True, value=column_values[row])


__all__ = ["ExtractionResult", "extract_cell", "is_table"]
