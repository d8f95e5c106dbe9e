"""A mutable set with explicit bulk and query operations."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from collections.abc import Set as AbstractSet
from typing import Any

from gotkit import seqs


class Set(AbstractSet):
    """A mutable collection of distinct hashable elements."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, elements: Iterable[Hashable] | None = None, capacity: int = 0) -> None:
        # ``capacity`` is only a sizing hint; Python sets grow on demand.
        self._items: set[Any] = set() if elements is None else set(elements)

    @classmethod
    def from_elements(cls, *args: Hashable) -> Set:
        """Create a set holding the given elements."""
        return cls(args)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, element: object) -> bool:
        return element in self._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._items, key=repr)!r})"

    def is_empty(self) -> bool:
        """Return whether the set has no elements."""
        return not self._items

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def clone(self) -> Set:
        """Return an independent copy of the set."""
        return type(self)(self._items)

    def equal(self, other: Iterable[Any]) -> bool:
        """Return whether both sets hold exactly the same elements."""
        return self._items == set(other)

    def add(self, element: Hashable) -> bool:
        """Add ``element``; return False if it was already present."""
        if element in self._items:
            return False
        self._items.add(element)
        return True

    def add_many(self, *args: Hashable) -> None:
        """Add every given element."""
        self._items.update(args)

    def add_all(self, source: Iterable[Hashable]) -> None:
        """Add every element of ``source``."""
        self._items.update(source)

    def remove(self, element: Hashable) -> bool:
        """Remove ``element``; return False if it was not present."""
        if element not in self._items:
            return False
        self._items.discard(element)
        return True

    def remove_many(self, *args: Hashable) -> None:
        """Remove every given element that is present."""
        self._items.difference_update(args)

    def remove_all(self, source: Iterable[Hashable]) -> None:
        """Remove every element of ``source`` that is present."""
        self._items.difference_update(source)

    def contains(self, *args: Hashable) -> bool:
        """Return whether all the given elements are present."""
        return all(element in self._items for element in args)

    def contains_all(self, source: Iterable[Hashable]) -> bool:
        """Return whether every element of ``source`` is present."""
        return all(element in self._items for element in source)

    def contains_any(self, *args: Hashable) -> bool:
        """Return whether at least one of the given elements is present."""
        return any(element in self._items for element in args)

    def contains_any_from(self, source: Iterable[Hashable]) -> bool:
        """Return whether at least one element of ``source`` is present."""
        return any(element in self._items for element in source)

    def is_subset_of(self, other: Set) -> bool:
        """Return whether every element of this set is in ``other``."""
        return other.contains_all(self)

    def is_superset_of(self, other: Set) -> bool:
        """Return whether every element of ``other`` is in this set."""
        return self.contains_all(other)

    def is_proper_subset_of(self, other: Set) -> bool:
        """Return whether this set is a subset of ``other`` but not equal to it."""
        return self.is_subset_of(other) and not self.equal(other)

    def is_proper_superset_of(self, other: Set) -> bool:
        """Return whether this set is a superset of ``other`` but not equal to it."""
        return self.is_superset_of(other) and not self.equal(other)

    def diff(self, other: Iterable[Hashable]) -> Set:
        """Return a new set of the elements not in ``other``."""
        result = self.clone()
        result.remove_all(other)
        return result

    def symmetric_diff(self, other: Set) -> Set:
        """Return a new set of the elements in exactly one of the two sets."""
        result = self.diff(other)
        result.add_all(other.diff(self))
        return result

    def union(self, other: Iterable[Hashable]) -> Set:
        """Return a new set of the elements in either set."""
        result = self.clone()
        result.add_all(other)
        return result

    def to_list(self) -> list[Any]:
        """Return the elements as a list in no particular order."""
        return list(self._items)

    def all_match(self, predicate: Callable[[Any], bool]) -> bool:
        """Return whether every element satisfies ``predicate``; true when empty."""
        return seqs.all_match(self._items, predicate)

    def any_match(self, predicate: Callable[[Any], bool]) -> bool:
        """Return whether some element satisfies ``predicate``; false when empty."""
        return seqs.any_match(self._items, predicate)

    def count(self, predicate: Callable[[Any], bool]) -> int:
        """Return how many elements satisfy ``predicate``."""
        return seqs.count(self._items, predicate)

    def filter(self, predicate: Callable[[Any], bool]) -> Set:
        """Return a new set of the elements satisfying ``predicate``."""
        return type(self)(seqs.select(self._items, predicate))