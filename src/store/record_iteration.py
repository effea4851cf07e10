"""Read-only iteration over stored records.

This module exposes records in ascending identity order without
handing out the store's own mapping. Removal through an iterator or
sequence is rejected, and live iterators fail fast when the owning
dataset is mutated underneath them.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice
import operator
from typing import Any, Callable, Iterator, Mapping

from core.errors import ConcurrentMutationError, ReadOnlyViewError
from core.types import RecordLike

MutationCounter = Callable[[], int]


class RecordIterator:
    """Single-pass iterator over records in identity order."""

    def __init__(
        self,
        records: Mapping[int, RecordLike],
        mutation_counter: MutationCounter | None = None,
    ) -> None:
        """Create an iterator bound to a record mapping.

        Args:
            records: Identity-ordered record mapping owned by a dataset.
            mutation_counter: Optional callable returning the dataset's
                mutation count; when given, any change since creation
                raises ConcurrentMutationError on the next step.
        """
        self._records = records
        self._record_ids = iter(tuple(records))
        self._mutation_counter = mutation_counter
        self._expected_mutations = mutation_counter() if mutation_counter else 0

    def __iter__(self) -> "RecordIterator":
        return self

    def __next__(self) -> RecordLike:
        if self._mutation_counter is not None:
            if self._mutation_counter() != self._expected_mutations:
                raise ConcurrentMutationError(
                    "Dataset was mutated during iteration. "
                    "Finish iterating before calling add, update, remove_column or clear."
                )
        for record_id in self._record_ids:
            record = self._records.get(record_id)
            if record is not None:
                return record
        raise StopIteration

    def remove(self) -> None:
        raise ReadOnlyViewError("Records cannot be removed through a dataset iterator.")


class RecordSequence(Sequence):
    """Restartable read-only sequence of records in identity order."""

    def __init__(
        self,
        records: Mapping[int, RecordLike],
        mutation_counter: MutationCounter | None = None,
    ) -> None:
        self._records = records
        self._mutation_counter = mutation_counter

    def __iter__(self) -> RecordIterator:
        return RecordIterator(self._records, self._mutation_counter)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, position: Any) -> Any:
        """Return the record (or records, for a slice) at a position."""
        if isinstance(position, slice):
            return tuple(self._records.values())[position]
        index = operator.index(position)
        if index < 0:
            index += len(self._records)
        if not 0 <= index < len(self._records):
            raise IndexError("Dataset record sequence index out of range.")
        return next(islice(self._records.values(), index, None))

    def __reversed__(self) -> Iterator[RecordLike]:
        return reversed(tuple(self._records.values()))

    def index(self, value: Any, start: int = 0, stop: int | None = None) -> int:
        """Return the position of the first matching record."""
        if start < 0:
            start = max(len(self._records) + start, 0)
        if stop is not None and stop < 0:
            stop += len(self._records)
        for position, record in islice(enumerate(self), start, stop):
            if record is value or record == value:
                return position
        raise ValueError("Record is not in the dataset sequence.")

    def __setitem__(self, position: Any, value: Any) -> None:
        raise ReadOnlyViewError("Dataset record sequences are read-only.")

    def __delitem__(self, position: Any) -> None:
        raise ReadOnlyViewError("Records cannot be removed through a dataset sequence.")

    def remove(self, value: Any = None) -> None:
        raise ReadOnlyViewError("Records cannot be removed through a dataset sequence.")
