"""Public SDK surface for tabular datasets.

This module provides a stable import path for pipeline code.
It re-exports the dataset container, record model and errors.
"""

from __future__ import annotations

from core.column_types import infer_column_type
from core.config import TabularConfig
from core.constants import CONSTANT_COLUMN, Y_COLUMN
from core.errors import (
    ConcurrentMutationError,
    ReadOnlyViewError,
    RecordIdentityError,
    RecordLookupError,
    TabularConfigError,
    TabularError,
)
from core.types import ColumnType, FlatDataList, Record, RecordLike, TransposeDataList
from store.dataset import Dataset

__all__ = [
    "CONSTANT_COLUMN",
    "ColumnType",
    "ConcurrentMutationError",
    "Dataset",
    "FlatDataList",
    "ReadOnlyViewError",
    "Record",
    "RecordIdentityError",
    "RecordLike",
    "RecordLookupError",
    "TabularConfig",
    "TabularConfigError",
    "TabularError",
    "TransposeDataList",
    "Y_COLUMN",
    "infer_column_type",
]
