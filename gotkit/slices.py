"""Helpers over in-memory sequences such as lists and tuples.

A ``None`` in place of a sequence is treated as an empty one.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Hashable, Iterator, Sequence
from typing import Any, TypeVar

from gotkit.core import negate
from gotkit.sets import Set

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _items(items: Sequence[T] | None) -> Sequence[T]:
    return () if items is None else items


def all_match(items: Sequence[T] | None, predicate: Callable[[T], bool]) -> bool:
    """Return whether every item satisfies ``predicate``; true when empty."""
    return all(predicate(item) for item in _items(items))


def any_match(items: Sequence[T] | None, predicate: Callable[[T], bool]) -> bool:
    """Return whether some item satisfies ``predicate``; false when empty."""
    return any(predicate(item) for item in _items(items))


def iter_chunks(items: Sequence[T] | None, size: int) -> Iterator[Sequence[T]]:
    """Lazily yield consecutive slices of ``items`` holding at most ``size`` items.

    Raises ValueError when ``size`` is not positive.
    """
    if size <= 0:
        raise ValueError(f"chunk size must be positive, got {size}")
    sequence = _items(items)

    def generate() -> Iterator[Sequence[T]]:
        for start in range(0, len(sequence), size):
            yield sequence[start:start + size]

    return generate()


def chunks(items: Sequence[T] | None, size: int) -> list[Sequence[T]]:
    """Return consecutive slices of ``items`` holding at most ``size`` items."""
    return list(iter_chunks(items, size))


def process_in_chunks(
    items: Sequence[T] | None, size: int, f: Callable[[Sequence[T]], Any]
) -> None:
    """Call ``f`` on each chunk in order; an exception from ``f`` stops the run."""
    for chunk in iter_chunks(items, size):
        f(chunk)


def count(items: Sequence[T] | None, predicate: Callable[[T], bool]) -> int:
    """Return how many items satisfy ``predicate``."""
    return sum(1 for item in _items(items) if predicate(item))


def select(items: Sequence[T] | None, predicate: Callable[[T], bool]) -> list[T]:
    """Return a new list of the items that satisfy ``predicate``."""
    return [item for item in _items(items) if predicate(item)]


def select_in_place(items: list[T] | None, predicate: Callable[[T], bool]) -> list[T]:
    """Drop from ``items`` every item failing ``predicate`` and return the same list."""
    if items is None:
        return []
    items[:] = [item for item in items if predicate(item)]
    return items


def select_to_iter(
    items: Sequence[T] | None, predicate: Callable[[T], bool]
) -> Iterator[T]:
    """Lazily yield the items that satisfy ``predicate``."""
    for item in _items(items):
        if predicate(item):
            yield item


def find(items: Sequence[T] | None, predicate: Callable[[T], bool]) -> tuple[int, T | None]:
    """Return ``(index, item)`` of the first item satisfying ``predicate``.

    When nothing matches, ``(-1, None)`` is returned.
    """
    for index, item in enumerate(_items(items)):
        if predicate(item):
            return index, item
    return -1, None


def group_by(
    items: Sequence[T] | None, key_value: Callable[[T], tuple[K, V]]
) -> dict[K, list[V]]:
    """Group items by key; ``key_value`` maps an item to a ``(key, value)`` pair."""
    groups: dict[K, list[V]] = {}
    for item in _items(items):
        key, value = key_value(item)
        groups.setdefault(key, []).append(value)
    return groups


def transform(items: Sequence[T] | None, f: Callable[[T], U]) -> list[U]:
    """Return ``[f(item) for item in items]``."""
    return [f(item) for item in _items(items)]


def transform_to_iter(items: Sequence[T] | None, f: Callable[[T], U]) -> Iterator[U]:
    """Lazily yield ``f(item)`` for every item."""
    for item in _items(items):
        yield f(item)


def transform_unique(items: Sequence[T] | None, f: Callable[[T], U]) -> list[U]:
    """Return the distinct results of ``f`` in order of first appearance."""
    return list(transform_unique_to_iter(items, f))


def transform_unique_to_iter(
    items: Sequence[T] | None, f: Callable[[T], U]
) -> Iterator[U]:
    """Lazily yield ``f(item)``, skipping results already yielded."""
    seen = Set()
    for item in _items(items):
        result = f(item)
        if seen.add(result):
            yield result


def partition(
    items: Sequence[T] | None, predicate: Callable[[T], bool]
) -> tuple[list[T], list[T]]:
    """Return lists of the items that do and do not satisfy ``predicate``."""
    matching: list[T] = []
    rest: list[T] = []
    for item in _items(items):
        (matching if predicate(item) else rest).append(item)
    return matching, rest


def partition_to_iters(
    items: Sequence[T] | None, predicate: Callable[[T], bool]
) -> tuple[Iterator[T], Iterator[T]]:
    """Return lazy iterators of the items that do and do not satisfy ``predicate``."""
    return select_to_iter(items, predicate), select_to_iter(items, negate(predicate))


def partition_cons_eq(
    items: Sequence[T] | None, eq: Callable[[T, T], bool]
) -> list[Sequence[T]]:
    """Return the runs of consecutive items for which ``eq(item, previous)`` holds."""
    return list(partition_cons_eq_to_iter(items, eq))


def partition_cons_eq_to_iter(
    items: Sequence[T] | None, eq: Callable[[T, T], bool]
) -> Iterator[Sequence[T]]:
    """Lazily yield slices of consecutive items for which ``eq(item, previous)`` holds."""
    sequence = _items(items)
    if not sequence:
        return
    start = 0
    for index, (previous, current) in enumerate(zip(sequence, sequence[1:]), start=1):
        if not eq(current, previous):
            yield sequence[start:index]
            start = index
    yield sequence[start:]


def fold(items: Sequence[T] | None, initial: A, f: Callable[[T, A], A]) -> A:
    """Reduce items left to right with ``accumulator = f(item, accumulator)``."""
    accumulator = initial
    for item in _items(items):
        accumulator = f(item, accumulator)
    return accumulator


def sort(items: list[T], compare: Callable[[T, T], int]) -> None:
    """Sort ``items`` in place by a three-way ``compare`` function."""
    items.sort(key=functools.cmp_to_key(compare))


def sorted_copy(items: Sequence[T] | None, compare: Callable[[T, T], int]) -> list[T]:
    """Return a new list of ``items`` sorted by a three-way ``compare`` function."""
    return sorted(_items(items), key=functools.cmp_to_key(compare))