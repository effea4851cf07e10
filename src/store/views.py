"""Column and label views over records.

This module extracts flat and label-grouped value lists used by
downstream statistical and learning algorithms. Missing column
entries are returned as None.
"""

from __future__ import annotations

from typing import Any, Iterable

from core.types import FlatDataList, RecordLike, TransposeDataList


def extract_column_values(records: Iterable[RecordLike], column: Any) -> FlatDataList:
    """Collect one column's value from every record.

    Args:
        records: Records in identity order.
        column: Column identifier to read.

    Returns:
        Values in record order, None where the column is missing.
    """
    return FlatDataList(record.get_x().get(column) for record in records)


def extract_y_values(records: Iterable[RecordLike]) -> FlatDataList:
    """Collect the label of every record, in record order."""
    return FlatDataList(record.get_y() for record in records)


def extract_column_values_by_y(records: Iterable[RecordLike], column: Any) -> TransposeDataList:
    """Group one column's values under each record's label.

    Buckets are created in order of first label appearance and each
    bucket keeps the order in which its records were scanned.

    Args:
        records: Records in identity order.
        column: Column identifier to read.

    Returns:
        Mapping of label to the column values of its records.
    """
    grouped = TransposeDataList()
    for record in records:
        grouped.bucket(record.get_y()).append(record.get_x().get(column))
    return grouped
