"""Shared typed models.

This module defines the record, column type and view containers
used by the dataset store and by downstream algorithm code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Iterator, MutableMapping, Protocol

import numpy as np


class ColumnType(Enum):
    """Inferred semantic type of a feature column."""

    ORDINAL = "ordinal"
    NUMERICAL = "numerical"
    DUMMYVAR = "dummyvar"
    CATEGORICAL = "categorical"


class RecordLike(Protocol):
    """Interface a record must expose to be stored in a Dataset."""

    def get_x(self) -> MutableMapping[Hashable, Any]:
        ...

    def get_y(self) -> Any:
        ...

    def get_id(self) -> int | None:
        ...

    def set_id(self, record_id: int | None) -> None:
        ...

    def quick_copy(self) -> "RecordLike":
        ...


@dataclass(eq=False)
class Record:
    """One labeled observation.

    Attributes:
        x: Feature values keyed by column identifier.
        y: Label value, None for unlabeled observations.
        record_id: Store-assigned identity, None until stored.
    """

    x: dict[Hashable, Any] = field(default_factory=dict)
    y: Any = None
    record_id: int | None = None

    def get_x(self) -> dict[Hashable, Any]:
        return self.x

    def get_y(self) -> Any:
        return self.y

    def get_id(self) -> int | None:
        return self.record_id

    def set_id(self, record_id: int | None) -> None:
        self.record_id = record_id

    def quick_copy(self) -> "Record":
        """Return a record sharing this record's x mapping and y value.

        Only the identity slot is independent, so changes made to the
        feature mapping of either record are visible through both.

        Returns:
            New record with the same x/y references and identity.
        """
        return Record(x=self.x, y=self.y, record_id=self.record_id)


class FlatDataList(list):
    """Ordered column of values extracted from a dataset."""

    def to_numpy(self, dtype: Any = None) -> np.ndarray:
        """Convert values into a numpy array.

        Args:
            dtype: Optional numpy dtype. With a float dtype, missing
                (None) entries become NaN.

        Returns:
            One-dimensional array of the values.
        """
        if dtype is not None and np.issubdtype(np.dtype(dtype), np.floating):
            return np.array([np.nan if value is None else value for value in self], dtype=dtype)
        return np.asarray(self, dtype=dtype)


class TransposeDataList(dict):
    """Column values grouped by label, in order of first label appearance."""

    def labels(self) -> list[Any]:
        return list(self.keys())

    def bucket(self, label: Any) -> FlatDataList:
        """Return the bucket for a label, creating it when absent."""
        values = self.get(label)
        if values is None:
            values = FlatDataList()
            self[label] = values
        return values

    def iter_values(self) -> Iterator[Any]:
        """Yield every grouped value, bucket by bucket."""
        for values in self.values():
            yield from values
