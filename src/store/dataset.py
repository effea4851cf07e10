"""In-memory labeled dataset.

This module owns the record store keyed by dense integer identities
and keeps the lazily inferred column schema in step with it. Views,
subsets and merges are delegated to their own modules.

Identities are assigned as the current store size. This keeps the
range dense while records are only appended, but an identity set by
``update`` beyond the current size is later reassigned by ``add`` and
overwritten. A future single-record delete needs a re-indexing or
tombstoning strategy before it can be added.
"""

from __future__ import annotations

import operator
from typing import Any, Hashable, Iterable, Mapping

from core.config import TabularConfig
from core.errors import RecordIdentityError
from core.logging_config import configure_logging, get_logger
from core.types import ColumnType, FlatDataList, RecordLike, TransposeDataList
from store.record_iteration import MutationCounter, RecordIterator, RecordSequence
from store.schema import ColumnSchema
from store.subset import generate_new_subset, merge_into
from store.views import extract_column_values, extract_column_values_by_y, extract_y_values

_LOGGER = get_logger(__name__)


class Dataset:
    """Collection of records plus the schema inferred from them.

    Not safe for concurrent mutation. Iterators are live views over
    the store; mutating the dataset while one is being consumed raises
    ConcurrentMutationError unless the check is disabled in config.
    """

    def __init__(self, config: TabularConfig | None = None) -> None:
        """Create an empty dataset.

        An explicitly passed config also sets the process-wide log level.

        Args:
            config: Optional runtime configuration.
        """
        if config is not None:
            configure_logging(config)
        self._config = config or TabularConfig.from_env()
        self._records: dict[int, RecordLike] = {}
        self._schema = ColumnSchema()
        self._mutations = 0

    @property
    def config(self) -> TabularConfig:
        return self._config

    def size(self) -> int:
        return len(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def get(self, record_id: int) -> RecordLike | None:
        """Return the record stored under an identity, or None."""
        return self._records.get(record_id)

    def record_ids(self) -> list[int]:
        return list(self._records)

    @property
    def columns(self) -> Mapping[Hashable, ColumnType]:
        """Read-only mapping of column identifier to inferred type."""
        return self._schema.columns

    def get_columns(self) -> Mapping[Hashable, ColumnType]:
        return self._schema.columns

    def column_count(self) -> int:
        return self._schema.column_count

    def add(self, original: RecordLike) -> int:
        """Store a quick copy of a record under the next identity.

        The copy shares the original's feature mapping and label; the
        original's own identity is left untouched.

        Args:
            original: Record to insert.

        Returns:
            Identity assigned to the stored copy.
        """
        new_record = original.quick_copy()
        new_id = len(self._records)
        if new_id in self._records:
            _LOGGER.warning("record_identity_collision", record_id=new_id)
        new_record.set_id(new_id)
        self._put(new_id, new_record)
        self._observe(new_record)
        _LOGGER.debug("record_added", record_id=new_id)
        return new_id

    def update(self, record: RecordLike) -> int:
        """Store a record under the identity it already carries.

        Args:
            record: Record with a non-negative integer identity.

        Returns:
            The record's identity.

        Raises:
            RecordIdentityError: If the record has no usable identity.
        """
        record_id = record.get_id()
        if record_id is None:
            raise RecordIdentityError("Cannot update a record without an id; use add() instead.")
        try:
            normalized_id = operator.index(record_id)
        except TypeError as error:
            raise RecordIdentityError(
                f"Invalid record id {record_id!r}: expected a non-negative integer."
            ) from error
        if isinstance(record_id, bool) or normalized_id < 0:
            raise RecordIdentityError(
                f"Invalid record id {record_id!r}: expected a non-negative integer."
            )
        record.set_id(normalized_id)
        self._put(normalized_id, record)
        self._observe(record)
        return normalized_id

    def remove_column(self, column: Any) -> bool:
        """Drop a column from the schema and from every stored record.

        Args:
            column: Column identifier to drop.

        Returns:
            True if the column was known to the schema, else False.
        """
        if not self._schema.remove(column):
            return False
        for record in self._records.values():
            record.get_x().pop(column, None)
        self._mutations += 1
        _LOGGER.info("column_removed", column=str(column), record_count=len(self._records))
        return True

    def clear(self) -> None:
        """Discard all records and schema entries."""
        self._records.clear()
        self._schema.clear()
        self._mutations += 1
        _LOGGER.info("dataset_cleared")

    def reset_meta(self) -> None:
        """Recompute the schema from the records currently stored."""
        self._schema.reset(self.iterate())
        _LOGGER.info("schema_reset", column_count=self._schema.column_count)

    def iterate(self) -> RecordSequence:
        """Return a restartable read-only sequence of records in id order."""
        return RecordSequence(self._records, self._mutation_counter())

    def __iter__(self) -> RecordIterator:
        return iter(self.iterate())

    def extract_column_values(self, column: Any) -> FlatDataList:
        return extract_column_values(self, column)

    def extract_y_values(self) -> FlatDataList:
        return extract_y_values(self)

    def extract_column_values_by_y(self, column: Any) -> TransposeDataList:
        return extract_column_values_by_y(self, column)

    def generate_new_subset(self, record_ids: Iterable[object]) -> "Dataset":
        """Build a new dataset from the given ids; see store.subset."""
        return generate_new_subset(self, record_ids)

    def merge(self, other: "Dataset") -> None:
        """Append quick copies of every record of another dataset."""
        merge_into(self, other)

    def __repr__(self) -> str:
        return f"Dataset(size={len(self._records)}, columns={self._schema.column_count})"

    def _mutation_counter(self) -> MutationCounter | None:
        if not self._config.check_iteration_mutation:
            return None
        return lambda: self._mutations

    def _observe(self, record: RecordLike) -> None:
        registered = self._schema.observe(record)
        if registered:
            _LOGGER.debug("columns_registered", columns=[str(column) for column in registered])

    def _put(self, record_id: int, record: RecordLike) -> None:
        """Insert or overwrite a record, keeping identities in ascending order."""
        needs_reorder = (
            bool(self._records)
            and record_id not in self._records
            and record_id < next(reversed(self._records))
        )
        self._records[record_id] = record
        self._mutations += 1
        if needs_reorder:
            ordered = sorted(self._records.items())
            self._records.clear()
            self._records.update(ordered)
