# gotkit

Small, dependency-free helpers for working with predicates, three-way
comparators, iterables, lists, mappings and sets. Requires Python 3.10 or
later.

## Install

```
pip install .
```

## Modules

### `gotkit.core`

- `ternary(a, b, condition)` returns `a` if `condition()` is true, else `b`.
- `flip(f)` returns a binary function calling `f` with its arguments swapped.
- Predicates and combinators: `always_true`, `always_false`, `negate`,
  `all_of(*predicates)`, `any_of(*predicates)`.
- Membership predicates: `in_container`, `in_set`, `in_map` (key lookup),
  `in_list` and `in_iterable` (the iterable is scanned on every call, so it
  should be re-iterable).
- Protocols `Container`, `Comparable` (a `compare(other)` method returning
  <0, 0 or >0) and `ZeroCheckable` (an `is_zero()` method).

### `gotkit.basic`

- Arithmetic: `add`, `sub`, `mul`, `div`. `div` truncates integer division
  toward zero and raises `ZeroDivisionError` for a zero integer divisor;
  floats divided by zero give `inf` or `nan`.
- `int_range(n)` returns `[0, ..., n-1]`, empty when `n <= 0`.
- `choose(*values)` returns the first truthy value, the last value if all are
  falsy, and `None` when called with no values.
- Comparators returning -1, 0 or 1: `compare`, `compare_to(b)`,
  `compare_by(key)`, `compare_by2(first, second)`.
- Value predicates: `in_range` (inclusive), `greater_than`, `less_than`,
  `greater_or_equal_to`, `less_or_equal_to`, `equal_to`, plus `equal` and
  `is_zero`.
- String predicates: `in_string`, `contains_substring`, `starts_with_string`,
  `ends_with_string`, `matches_regexp` (searches with `re.search`; an invalid
  pattern raises `re.error` when the predicate is called) and
  `matches_regexp_compiled`.

### `gotkit.maps`

`keys`, `values`, and `append_keys` / `append_values`, which extend a given
list (or a new one when `None` is passed) and return it.

### `gotkit.seqs`

Helpers over any iterable; `None` is treated as empty. Lazy generators:
`select`, `transform`, `transform_unique`, `partition` (two iterators),
`partition_cons_eq` (runs of consecutive items where `eq(previous, item)`
holds). Eager counterparts: `select_to_list`, `transform_to_list`,
`transform_unique_to_list`, `partition_to_lists`,
`partition_cons_eq_to_list`. Also `all_match`, `any_match`, `count`,
`find` (returns `(index, item)` or `(-1, None)`), `group_by` (the function
maps an item to a `(key, value)` pair) and `fold` (calls
`f(item, accumulator)`).

### `gotkit.slices`

The same operations for lists and other sequences, returning lists by
default with `*_to_iter` lazy variants (`select_to_iter`,
`transform_to_iter`, `transform_unique_to_iter`, `partition_to_iters`,
`partition_cons_eq_to_iter`), plus:

- `select_in_place(items, predicate)` filters a list in place and returns it.
- `chunks`, `iter_chunks` and `process_in_chunks(items, size, f)` split a
  sequence into slices of at most `size` items; a non-positive size raises
  `ValueError`, and an exception raised by `f` stops the run.
- `sort(items, compare)` and `sorted_copy(items, compare)` order by a
  three-way compare function.

### `gotkit.sets`

`Set(elements=None, capacity=0)` is a mutable set of hashable elements
(`capacity` is only a sizing hint) and a `collections.abc.Set`. It offers
`Set.from_elements(*elements)`, `len()`, iteration and `in`, and methods
`is_empty`, `clear`, `clone`, `equal`, `add` / `remove` (returning whether
the set changed), `add_many`, `add_all`, `remove_many`, `remove_all`,
`contains(*elements)` (all present), `contains_all`, `contains_any`,
`contains_any_from`, `is_subset_of`, `is_superset_of`,
`is_proper_subset_of`, `is_proper_superset_of`, `diff`, `symmetric_diff`,
`union`, `to_list`, `all_match`, `any_match`, `count` and `filter`.

### `gotkit.structs`

Helpers for objects with methods: `choose` (first value whose `is_zero()` is
false), `compare`, `compare_to`, `compare_by` (via `compare`), predicates
`in_range`, `greater_than`, `less_than`, `greater_or_equal_to`,
`less_or_equal_to`, `equal_to`, `equal`, `is_zero`, and getter helpers that
call the matching method: `get_id`, `get_product_id`, `get_customer_id`,
`get_event_id`, `get_account_id`, `get_name`, `get_event_name`,
`get_value_time`, `get_created_at`, `get_updated_at`, `get_amount`,
`get_transaction_id`, `get_priority`.

## Examples

```python
from gotkit import basic, core, slices
from gotkit.sets import Set

items = [1, 2, 3, 4, 5]
slices.select(items, core.any_of(basic.less_than(2), basic.greater_than(4)))
# [1, 5]

slices.sorted_copy([3, 1, 2], core.flip(basic.compare))
# [3, 2, 1]

list(slices.iter_chunks(list(range(10)), 3))
# [[0, 1, 2], [3, 4, 5], [6, 7, 8], [9]]

s = Set.from_elements(1, 2, 3)
s.is_proper_subset_of(Set.from_elements(1, 2, 3, 4))
# True
```

## What it does not do

This is a library only: it has no command-line program and no runtime
dependencies.

## Tests

```
pip install -e ".[test]"
pytest
```