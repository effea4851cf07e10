"""Subset and merge derivations.

This module builds new datasets from selected records and folds one
dataset into another. Both go through Dataset.add, so derived records
always receive fresh append-by-size identities.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Iterable

from core.errors import RecordLookupError
from core.logging_config import get_logger

if TYPE_CHECKING:
    from store.dataset import Dataset

_LOGGER = get_logger(__name__)


def generate_new_subset(source: "Dataset", record_ids: Iterable[object]) -> "Dataset":
    """Build a new dataset from source records in the given id order.

    Repeated ids are allowed and yield one new record per occurrence.

    Args:
        source: Dataset to read records from.
        record_ids: Source identities, in the order wanted in the subset.

    Returns:
        New dataset whose records are numbered 0..len(record_ids)-1.

    Raises:
        RecordLookupError: If any id is not stored in the source. No
            partial subset is built in that case.
    """
    resolved_ids = [operator.index(record_id) for record_id in record_ids]
    missing_ids = sorted({record_id for record_id in resolved_ids if record_id not in source})
    if missing_ids:
        raise RecordLookupError(
            f"Cannot build subset: record ids {missing_ids} are not in the source dataset "
            f"of size {source.size()}."
        )
    subset = type(source)(config=source.config)
    for record_id in resolved_ids:
        subset.add(source.get(record_id))
    _LOGGER.debug(
        "subset_generated",
        source_size=source.size(),
        subset_size=subset.size(),
    )
    return subset


def merge_into(target: "Dataset", source: "Dataset") -> list[int]:
    """Append quick copies of every source record to the target.

    Source records are read before any insert, so merging a dataset
    into itself doubles it.

    Args:
        target: Dataset receiving the records.
        source: Dataset read in its identity order; left unmodified.

    Returns:
        Identities assigned in the target, in source order.
    """
    source_records = list(source)
    assigned_ids = [target.add(record) for record in source_records]
    _LOGGER.info(
        "datasets_merged",
        merged_records=len(assigned_ids),
        target_size=target.size(),
    )
    return assigned_ids
