"""Column type inference.

This module maps one observed feature value to its ColumnType.
The dataset schema calls it once per column, on first sight.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np

from core.types import ColumnType

# Python int/float plus the numpy widths matching the common 32/64-bit kinds.
_COMMON_NUMERIC_TYPES = (float, int, np.float64, np.float32, np.int64, np.int32)
_BOOLEAN_TYPES = (bool, np.bool_)
_SHORT_INTEGER_TYPES = (np.int16,)


def infer_column_type(value: Any) -> ColumnType:
    """Infer the column type implied by a single value.

    The first matching rule wins: common numeric kinds are numerical,
    booleans are dummy variables, short integers are ordinal, any other
    number is numerical and everything else is categorical.

    Args:
        value: Observed feature value.

    Returns:
        Inferred column type.
    """
    # bool subclasses int, so it is excluded from the common numeric check.
    if isinstance(value, _COMMON_NUMERIC_TYPES) and not isinstance(value, _BOOLEAN_TYPES):
        return ColumnType.NUMERICAL
    if isinstance(value, _BOOLEAN_TYPES):
        return ColumnType.DUMMYVAR
    if isinstance(value, _SHORT_INTEGER_TYPES):
        return ColumnType.ORDINAL
    if isinstance(value, (numbers.Number, np.number)):
        return ColumnType.NUMERICAL
    return ColumnType.CATEGORICAL
