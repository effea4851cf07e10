"""Unit tests for read-only record iteration."""

from __future__ import annotations

import pytest

from core.config import TabularConfig
from core.errors import ConcurrentMutationError, ReadOnlyViewError
from core.types import Record
from store.dataset import Dataset


def _dataset(size: int, check: bool = True) -> Dataset:
    dataset = Dataset(TabularConfig(check_iteration_mutation=check))
    for index in range(size):
        dataset.add(Record(x={"v": index}, y=index % 2))
    return dataset


def test_sequence_is_restartable() -> None:
    """Iterating the same sequence twice should yield the same records."""
    sequence = _dataset(3).iterate()

    first = [record.get_id() for record in sequence]
    second = [record.get_id() for record in sequence]

    assert first == second == [0, 1, 2]
    assert len(sequence) == 3


def test_sequence_supports_positional_indexing() -> None:
    """Sequences should be indexable by position in identity order."""
    sequence = _dataset(3).iterate()

    assert sequence[0].get_id() == 0
    assert sequence[-1].get_id() == 2


def test_sequence_reverses_and_finds_positions() -> None:
    """Reverse iteration and index lookup should follow identity order."""
    sequence = _dataset(3).iterate()
    middle = sequence[1]

    assert [record.get_id() for record in reversed(sequence)] == [2, 1, 0]
    assert sequence.index(middle) == 1
    with pytest.raises(IndexError):
        sequence[3]


def test_iterator_remove_is_rejected() -> None:
    """Removing through an iterator should raise an unsupported operation."""
    iterator = iter(_dataset(2))
    next(iterator)

    with pytest.raises(ReadOnlyViewError):
        iterator.remove()


def test_sequence_mutation_is_rejected() -> None:
    """Sequences should reject deletion and assignment."""
    sequence = _dataset(2).iterate()

    with pytest.raises(ReadOnlyViewError):
        del sequence[0]
    with pytest.raises(ReadOnlyViewError):
        sequence.remove(sequence[0])
    with pytest.raises(TypeError):
        sequence[0] = Record()


def test_mutation_during_iteration_fails_fast() -> None:
    """Adding while an iterator is live should raise on the next step."""
    dataset = _dataset(3)
    iterator = iter(dataset)
    next(iterator)

    dataset.add(Record(x={"v": 99}))

    with pytest.raises(ConcurrentMutationError):
        next(iterator)


def test_unchecked_iteration_sees_live_values() -> None:
    """With the check disabled, iteration continues over the live store."""
    dataset = _dataset(2, check=False)
    iterator = iter(dataset)
    next(iterator)

    dataset.remove_column("v")

    assert next(iterator).get_x() == {}


def test_iterator_stops_after_clear_when_unchecked() -> None:
    """Cleared records should end unchecked iteration instead of failing."""
    dataset = _dataset(3, check=False)
    iterator = iter(dataset)
    next(iterator)

    dataset.clear()

    assert list(iterator) == []
