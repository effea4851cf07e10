"""Lazy column schema.

This module tracks one ColumnType per column identifier. A column is
typed from the first value observed for it and keeps that type until
the schema is reset or the column is removed.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Hashable, Iterable, Mapping

from core.column_types import infer_column_type
from core.types import ColumnType, RecordLike


class ColumnSchema:
    """Insert-if-absent mapping from column identifier to ColumnType."""

    def __init__(self) -> None:
        self._columns: dict[Hashable, ColumnType] = {}

    @property
    def columns(self) -> Mapping[Hashable, ColumnType]:
        """Read-only live mapping of column identifier to type."""
        return MappingProxyType(self._columns)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    def __contains__(self, column: object) -> bool:
        return column in self._columns

    def type_of(self, column: Any) -> ColumnType | None:
        return self._columns.get(column)

    def observe(self, record: RecordLike) -> list[Hashable]:
        """Register types for columns of a record not yet in the schema.

        Columns that already have a type are left untouched, whatever
        the shape of the value in this record.

        Args:
            record: Record whose feature mapping is scanned.

        Returns:
            Column identifiers registered by this call.
        """
        registered: list[Hashable] = []
        for column, value in record.get_x().items():
            if column not in self._columns:
                self._columns[column] = infer_column_type(value)
                registered.append(column)
        return registered

    def reset(self, records: Iterable[RecordLike]) -> None:
        """Rebuild the schema from the current record contents.

        The result may differ from the incrementally built schema when
        stored values changed shape after their column was first typed.

        Args:
            records: Records to observe, in identity order.
        """
        self._columns.clear()
        for record in records:
            self.observe(record)

    def remove(self, column: Any) -> bool:
        """Drop a column entry, returning whether it was present."""
        if column not in self._columns:
            return False
        del self._columns[column]
        return True

    def clear(self) -> None:
        self._columns.clear()
