"""Functional helpers for predicates, comparators, iterables, lists, mappings and sets."""

__version__ = "0.1.0"
__all__ = ["basic", "core", "maps", "seqs", "sets", "slices", "structs"]