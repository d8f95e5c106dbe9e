"""Helpers for extracting keys and values from mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def keys(mapping: Mapping) -> list:
    """Return the keys of ``mapping`` as a new list."""
    return list(mapping)


def values(mapping: Mapping) -> list:
    """Return the values of ``mapping`` as a new list."""
    return list(mapping.values())


def append_keys(mapping: Mapping, dest: list | None) -> list[Any]:
    """Append the keys of ``mapping`` to ``dest`` (a new list if None) and return it."""
    result = [] if dest is None else dest
    result.extend(mapping)
    return result


def append_values(mapping: Mapping, dest: list | None) -> list[Any]:
    """Append the values of ``mapping`` to ``dest`` (a new list if None) and return it."""
    result = [] if dest is None else dest
    result.extend(mapping.values())
    return result