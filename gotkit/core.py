"""Generic helpers: conditional choice, argument flipping and predicate combinators."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
R = TypeVar("R")
T_contra = TypeVar("T_contra", contravariant=True)

Predicate = Callable[[T], bool]


@runtime_checkable
class Container(Protocol[T_contra]):
    """Anything that can answer a membership question."""

    def __contains__(self, value: T_contra) -> bool: ...


@runtime_checkable
class Comparable(Protocol[T_contra]):
    """Anything with a three-way ``compare`` method returning <0, 0 or >0."""

    def compare(self, other: T_contra) -> int: ...


@runtime_checkable
class ZeroCheckable(Protocol):
    """Anything that can tell whether it holds its zero value."""

    def is_zero(self) -> bool: ...


def ternary(a: T, b: T, condition: Callable[[], bool]) -> T:
    """Return ``a`` if ``condition()`` is true, otherwise ``b``."""
    return a if condition() else b


def flip(f: Callable[[T, T], R]) -> Callable[[T, T], R]:
    """Return a binary function that calls ``f`` with its arguments swapped."""

    def flipped(a: T, b: T) -> R:
        return f(b, a)

    return flipped


def always_true(value: Any) -> bool:
    """Predicate that accepts every value: the conjunction of no predicates."""
    return all_of()(value)


def always_false(value: Any) -> bool:
    """Predicate that rejects every value: the disjunction of no predicates."""
    return any_of()(value)


def negate(predicate: Predicate) -> Predicate:
    """Return a predicate that is true exactly when ``predicate`` is false."""

    def negated(value: Any) -> bool:
        return not predicate(value)

    return negated


def all_of(*args: Predicate) -> Predicate:
    """Return a predicate that holds when every given predicate holds."""

    def combined(value: Any) -> bool:
        return all(predicate(value) for predicate in args)

    return combined


def any_of(*args: Predicate) -> Predicate:
    """Return a predicate that holds when at least one given predicate holds."""

    def combined(value: Any) -> bool:
        return any(predicate(value) for predicate in args)

    return combined


def in_container(container: Container) -> Predicate:
    """Return a predicate testing membership in ``container``."""

    def member(value: Any) -> bool:
        return value in container

    return member


def in_set(values: set | frozenset) -> Predicate:
    """Return a predicate testing membership in a set."""

    def member(value: Any) -> bool:
        return value in values

    return member


def in_map(mapping: Mapping) -> Predicate:
    """Return a predicate testing whether a key is present in ``mapping``."""

    def member(key: Any) -> bool:
        return key in mapping

    return member


def in_list(values: list | tuple) -> Predicate:
    """Return a predicate testing whether a value occurs in a list."""

    def member(value: Any) -> bool:
        return any(element == value for element in values)

    return member


def in_iterable(values: Iterable) -> Predicate:
    """Return a predicate scanning ``values`` on every call.

    ``values`` should be re-iterable (a range, a view, a collection).
    """

    def member(value: Any) -> bool:
        return any(element == value for element in values)

    return member