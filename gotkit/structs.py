"""Helpers for objects exposing ``compare``, ``is_zero`` and getter methods."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")


def choose(*args):
    """Return the first value whose ``is_zero()`` is false.

    When every value is zero the last one is returned, and None when no
    values are given.
    """
    for value in args:
        if not value.is_zero():
            return value
    return args[-1] if args else None


def compare(a, b) -> int:
    """Return ``a.compare(b)``."""
    return a.compare(b)


def compare_to(b) -> Callable[[Any], int]:
    """Return a function computing ``a.compare(b)`` for its argument ``a``."""
    return lambda a: a.compare(b)


def compare_by(key: Callable[[T], Any]) -> Callable[[T, T], int]:
    """Return a comparison function ordering values by ``key(value).compare``."""
    return lambda a, b: key(a).compare(key(b))


def get_id(obj):
    """Return ``obj.get_id()``."""
    return obj.get_id()


def get_product_id(obj):
    """Return ``obj.get_product_id()``."""
    return obj.get_product_id()


def get_customer_id(obj):
    """Return ``obj.get_customer_id()``."""
    return obj.get_customer_id()


def get_event_id(obj):
    """Return ``obj.get_event_id()``."""
    return obj.get_event_id()


def get_account_id(obj):
    """Return ``obj.get_account_id()``."""
    return obj.get_account_id()


def get_name(obj):
    """Return ``obj.get_name()``."""
    return obj.get_name()


def get_event_name(obj):
    """Return ``obj.get_event_name()``."""
    return obj.get_event_name()


def get_value_time(obj):
    """Return ``obj.get_value_time()``."""
    return obj.get_value_time()


def get_created_at(obj):
    """Return ``obj.get_created_at()``."""
    return obj.get_created_at()


def get_updated_at(obj):
    """Return ``obj.get_updated_at()``."""
    return obj.get_updated_at()


def get_amount(obj):
    """Return ``obj.get_amount()``."""
    return obj.get_amount()


def get_transaction_id(obj):
    """Return ``obj.get_transaction_id()``."""
    return obj.get_transaction_id()


def get_priority(obj):
    """Return ``obj.get_priority()``."""
    return obj.get_priority()


def in_range(low, high) -> Callable[[Any], bool]:
    """Return a predicate for ``low <= value <= high`` using ``value.compare``."""
    return lambda value: value.compare(low) >= 0 and value.compare(high) <= 0


def greater_than(bound) -> Callable[[Any], bool]:
    """Return a predicate for ``value.compare(bound) > 0``."""
    return lambda value: value.compare(bound) > 0


def less_than(bound) -> Callable[[Any], bool]:
    """Return a predicate for ``value.compare(bound) < 0``."""
    return lambda value: value.compare(bound) < 0


def greater_or_equal_to(bound) -> Callable[[Any], bool]:
    """Return a predicate for ``value.compare(bound) >= 0``."""
    return lambda value: value.compare(bound) >= 0


def less_or_equal_to(bound) -> Callable[[Any], bool]:
    """Return a predicate for ``value.compare(bound) <= 0``."""
    return lambda value: value.compare(bound) <= 0


def equal_to(expected) -> Callable[[Any], bool]:
    """Return a predicate for ``value.compare(expected) == 0``."""
    return lambda value: value.compare(expected) == 0


def equal(a, b) -> bool:
    """Return whether ``a.compare(b)`` is zero."""
    return a.compare(b) == 0


def is_zero(value) -> bool:
    """Return ``value.is_zero()``."""
    return value.is_zero()