"""Arithmetic, comparison and predicate helpers for plain values."""

from __future__ import annotations

import math
import re
from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")
V = TypeVar("V")


def add(a, b):
    """Return ``a + b``."""
    return a + b


def sub(a, b):
    """Return ``a - b``."""
    return a - b


def mul(a, b):
    """Return ``a * b``."""
    return a * b


def div(a, b):
    """Return the quotient of two numbers.

    Integers divide with truncation toward zero and raise ZeroDivisionError
    on a zero divisor; floats follow IEEE rules and yield inf or nan.
    """
    if isinstance(a, int) and isinstance(b, int):
        if b == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(a) // abs(b)
        return quotient if (a >= 0) == (b >= 0) else -quotient
    a = float(a)
    b = float(b)
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def int_range(n: int) -> list[int]:
    """Return ``[0, 1, ..., n-1]``; empty when ``n <= 0``."""
    return list(range(n))


def choose(*args):
    """Return the first value that is not a zero value.

    When every value is a zero value the last one is returned, and None
    when no values are given.
    """
    for value in args:
        if not is_zero(value):
            return value
    return args[-1] if args else None


def compare(a, b) -> int:
    """Return -1, 0 or 1 as ``a`` is less than, equal to or greater than ``b``."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def compare_to(b) -> Callable[[Any], int]:
    """Return a function comparing its argument with ``b``."""

    def comparer(a) -> int:
        return compare(a, b)

    return comparer


def compare_by(key: Callable[[T], Any]) -> Callable[[T, T], int]:
    """Return a comparison function ordering values by ``key``."""

    def comparer(a: T, b: T) -> int:
        return compare(key(a), key(b))

    return comparer


def compare_by2(first: Callable[[T], Any], second: Callable[[T], Any]) -> Callable[[T, T], int]:
    """Return a comparison function ordering by ``first``, then by ``second``."""

    def comparer(a: T, b: T) -> int:
        return compare(first(a), first(b)) or compare(second(a), second(b))

    return comparer


def in_range(low, high) -> Callable[[Any], bool]:
    """Return a predicate for ``low <= value <= high``."""
    return lambda value: low <= value <= high


def greater_than(bound) -> Callable[[Any], bool]:
    """Return a predicate for ``value > bound``."""
    return lambda value: value > bound


def less_than(bound) -> Callable[[Any], bool]:
    """Return a predicate for ``value < bound``."""
    return lambda value: value < bound


def greater_or_equal_to(bound) -> Callable[[Any], bool]:
    """Return a predicate for ``value >= bound``."""
    return lambda value: value >= bound


def less_or_equal_to(bound) -> Callable[[Any], bool]:
    """Return a predicate for ``value <= bound``."""
    return lambda value: value <= bound


def equal_to(expected) -> Callable[[Any], bool]:
    """Return a predicate for ``value == expected``."""
    return lambda value: value == expected


def equal(a, b) -> bool:
    """Return whether ``a`` equals ``b``."""
    return a == b


def is_zero(value) -> bool:
    """Return whether ``value`` is the zero value of its kind (0, "", None, False...)."""
    return not value


def in_string(text: str) -> Callable[[str], bool]:
    """Return a predicate testing whether a substring occurs in ``text``."""
    return lambda sub: sub in text


def contains_substring(sub: str) -> Callable[[str], bool]:
    """Return a predicate testing whether a string contains ``sub``."""
    return lambda text: sub in text


def starts_with_string(prefix: str) -> Callable[[str], bool]:
    """Return a predicate testing whether a string starts with ``prefix``."""
    return lambda text: text.startswith(prefix)


def ends_with_string(suffix: str) -> Callable[[str], bool]:
    """Return a predicate testing whether a string ends with ``suffix``."""
    return lambda text: text.endswith(suffix)


def matches_regexp(pattern: str) -> Callable[[str], bool]:
    """Return a predicate searching a string for ``pattern``.

    An invalid pattern raises ``re.error`` when the predicate is called.
    """

    def matches(text: str) -> bool:
        return re.search(pattern, text) is not None

    return matches


def matches_regexp_compiled(regex: re.Pattern) -> Callable[[str], bool]:
    """Return a predicate searching a string with a compiled regular expression."""
    return lambda text: regex.search(text) is not None