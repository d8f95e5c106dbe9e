import functools

import pytest

from gotkit.core import (
    all_of,
    always_false,
    always_true,
    any_of,
    flip,
    in_container,
    in_iterable,
    in_list,
    in_map,
    in_set,
    negate,
    ternary,
)


def test_ternary_true():
    assert ternary(1, 2, lambda: True) == 1


def test_ternary_false():
    assert ternary(1, 2, lambda: False) == 2


def test_flip_swaps_arguments():
    assert flip(lambda a, b: a - b)(1, 3) == 2


def test_flip_reverses_sort_order():
    def cmp(a, b):
        return (a > b) - (a < b)

    items = [3, 1, 2]
    assert sorted(items, key=functools.cmp_to_key(flip(cmp))) == [3, 2, 1]


def test_always_true_and_false():
    assert [always_true(v) for v in (0, "", None)] == [True, True, True]
    assert [always_false(v) for v in (1, "x", object())] == [False, False, False]


def test_negate():
    even = negate(lambda x: x % 2 == 1)
    assert [x for x in range(6) if even(x)] == [0, 2, 4]


def test_all_of_empty_is_true_any_of_empty_is_false():
    assert all_of()(42) is True
    assert any_of()(42) is False


def test_in_set():
    s = [1, 2, 3, 4, 5]
    pred = in_set({4, 3, 2})
    assert [x for x in s if pred(x)] == [2, 3, 4]


def test_not_in_set():
    s = [1, 2, 3, 4, 5]
    pred = negate(in_set({4, 3, 2}))
    assert [x for x in s if pred(x)] == [1, 5]


def test_in_list():
    s = [1, 2, 3, 4, 5]
    pred = in_list([4, 3, 2])
    assert [x for x in s if pred(x)] == [2, 3, 4]


def test_not_in_list_strings():
    s = ["a", "b", "c", "d", "e"]
    pred = negate(in_list(["d", "c", "b"]))
    assert [x for x in s if pred(x)] == ["a", "e"]


def test_in_map():
    s = [1, 2, 3, 4, 5]
    pred = in_map({1: "a", 2: "b", 3: "c", 4: "d"})
    assert [x for x in s if pred(x)] == [1, 2, 3, 4]


def test_in_iterable():
    s = [1, 2, 3, 4, 5]
    pred = in_iterable((4, 3, 2))
    assert [x for x in s if pred(x)] == [2, 3, 4]


def test_in_iterable_rescans_each_call():
    pred = in_iterable(range(2, 5))
    assert [pred(x) for x in (1, 2, 4, 5)] == [False, True, True, False]


class _Evens:
    def __contains__(self, value):
        return value % 2 == 0


def test_in_container_custom():
    pred = in_container(_Evens())
    assert [x for x in range(1, 7) if pred(x)] == [2, 4, 6]


@pytest.mark.parametrize("value,expected", [(2, True), (7, False)])
def test_in_container_builtin(value, expected):
    assert in_container([1, 2, 3])(value) is expected