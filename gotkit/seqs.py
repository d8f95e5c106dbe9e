"""Lazy and eager helpers over arbitrary iterables.

A ``None`` in place of an iterable is treated as an empty sequence.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, TypeVar

from gotkit.core import negate

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def _iterate(items: Iterable[T] | None) -> Iterable[T]:
    return () if items is None else items


def all_match(items: Iterable[T] | None, predicate: Callable[[T], bool]) -> bool:
    """Return whether every item satisfies ``predicate``; true when empty."""
    return all(predicate(item) for item in _iterate(items))


def any_match(items: Iterable[T] | None, predicate: Callable[[T], bool]) -> bool:
    """Return whether some item satisfies ``predicate``; false when empty."""
    return any(predicate(item) for item in _iterate(items))


def count(items: Iterable[T] | None, predicate: Callable[[T], bool]) -> int:
    """Return how many items satisfy ``predicate``."""
    return sum(1 for item in _iterate(items) if predicate(item))


def select(items: Iterable[T] | None, predicate: Callable[[T], bool]) -> Iterator[T]:
    """Lazily yield the items that satisfy ``predicate``."""
    for item in _iterate(items):
        if predicate(item):
            yield item


def select_to_list(items: Iterable[T] | None, predicate: Callable[[T], bool]) -> list[T]:
    """Return a list of the items that satisfy ``predicate``."""
    return [item for item in _iterate(items) if predicate(item)]


def find(items: Iterable[T] | None, predicate: Callable[[T], bool]) -> tuple[int, T | None]:
    """Return ``(index, item)`` of the first item satisfying ``predicate``.

    When nothing matches, ``(-1, None)`` is returned.
    """
    for index, item in enumerate(_iterate(items)):
        if predicate(item):
            return index, item
    return -1, None


def group_by(
    items: Iterable[T] | None, key_value: Callable[[T], tuple[K, V]]
) -> dict[K, list[V]]:
    """Group items by key; ``key_value`` maps an item to a ``(key, value)`` pair."""
    groups: dict[K, list[V]] = {}
    for item in _iterate(items):
        key, value = key_value(item)
        groups.setdefault(key, []).append(value)
    return groups


def transform(items: Iterable[T] | None, f: Callable[[T], U]) -> Iterator[U]:
    """Lazily yield ``f(item)`` for every item."""
    for item in _iterate(items):
        yield f(item)


def transform_to_list(items: Iterable[T] | None, f: Callable[[T], U]) -> list[U]:
    """Return ``[f(item) for item in items]``."""
    return list(transform(items, f))


def transform_unique(items: Iterable[T] | None, f: Callable[[T], U]) -> Iterator[U]:
    """Lazily yield ``f(item)``, skipping results already yielded."""
    seen: set[Any] = set()
    for item in _iterate(items):
        result = f(item)
        if result not in seen:
            seen.add(result)
            yield result


def transform_unique_to_list(items: Iterable[T] | None, f: Callable[[T], U]) -> list[U]:
    """Return the distinct results of ``f`` in order of first appearance."""
    return list(transform_unique(items, f))


def partition(
    items: Iterable[T] | None, predicate: Callable[[T], bool]
) -> tuple[Iterator[T], Iterator[T]]:
    """Return lazy iterators of the items that do and do not satisfy ``predicate``."""
    matching, rest = itertools.tee(_iterate(items))
    return select(matching, predicate), select(rest, negate(predicate))


def partition_to_lists(
    items: Iterable[T] | None, predicate: Callable[[T], bool]
) -> tuple[list[T], list[T]]:
    """Return lists of the items that do and do not satisfy ``predicate``."""
    matching: list[T] = []
    rest: list[T] = []
    for item in _iterate(items):
        (matching if predicate(item) else rest).append(item)
    return matching, rest


def partition_cons_eq(
    items: Iterable[T] | None, eq: Callable[[T, T], bool]
) -> Iterator[list[T]]:
    """Lazily yield runs of consecutive items for which ``eq(previous, item)`` holds."""
    group: list[T] = []
    for item in _iterate(items):
        if not group or eq(group[-1], item):
            group.append(item)
        else:
            yield group
            group = [item]
    if group:
        yield group


def partition_cons_eq_to_list(
    items: Iterable[T] | None, eq: Callable[[T, T], bool]
) -> list[list[T]]:
    """Return the runs of consecutive equal items as a list of lists."""
    return list(partition_cons_eq(items, eq))


def fold(items: Iterable[T] | None, initial: A, f: Callable[[T, A], A]) -> A:
    """Reduce items left to right with ``accumulator = f(item, accumulator)``."""
    accumulator = initial
    for item in _iterate(items):
        accumulator = f(item, accumulator)
    return accumulator