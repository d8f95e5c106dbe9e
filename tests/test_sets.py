import pytest

from gotkit.sets import Set


def _is_even(value):
    return value % 2 == 0


@pytest.mark.parametrize(
    "factory",
    [
        lambda: Set.from_elements(1, 2, 2, 3),
        lambda: Set([1, 2, 2, 3]),
        lambda: Set(iter([1, 2, 2, 3])),
        lambda: Set(Set.from_elements(1, 2, 2, 3)),
    ],
)
def test_construction_deduplicates(factory):
    assert len(factory()) == 3


def test_add_and_remove_single():
    s = Set(capacity=10)
    assert not s.contains(42)
    assert s.add(42) is True
    assert s.add(42) is False
    assert s.contains(42)
    assert s.remove(42) is True
    assert s.remove(42) is False
    assert not s.contains(42)


def test_contains_variants_from_list():
    s = Set([1, 2, 3])
    assert s.contains(1) and s.contains(2) and s.contains(3)
    assert not s.contains(4)
    assert s.contains(2, 3)
    assert not s.contains(2, 4)
    assert s.contains_any(2, 4)
    assert not s.contains_any(4, 5)
    assert 2 in s and 4 not in s


def test_add_many():
    s = Set()
    s.add_many(1, 2, 3)
    assert s.contains(1, 2, 3)
    assert not s.contains(4)


def test_from_other_sets():
    s = Set(Set.from_elements(1, 2, 3))
    s.add_all(Set.from_elements(2, 3, 4))
    assert s.contains(1, 2, 3, 4)
    assert not s.contains(5)


def test_add_all_sources():
    s = Set()
    s.add_many(1, 2, 3)
    s.add_all(Set.from_elements(4, 5, 6))
    s.add_all([7, 8, 9])
    s.add_all(iter([10, 11, 12]))
    assert sorted(s.to_list()) == list(range(1, 13))


def test_remove_sources():
    s = Set.from_elements(1, 2, 3, 4, 5, 6, 7, 9)
    s.remove_many(1, 2)
    assert not s.contains_any(1, 2)
    s.remove_all(Set.from_elements(3, 4))
    assert not s.contains_any(3, 4)
    s.remove_all([5, 6])
    assert not s.contains_any(5, 6)
    s.remove_all(iter([7, 9]))
    assert not s.contains_any(7, 9)
    assert s.is_empty()


def test_clear():
    s = Set.from_elements(1, 2, 3)
    assert not s.is_empty()
    s.clear()
    assert s.is_empty()


def test_contains_all():
    s = Set.from_elements(1, 2, 3)
    assert s.contains(1, 2)
    assert not s.contains(1, 4)
    assert s.contains_all(Set.from_elements(1, 2))
    assert not s.contains_all(Set.from_elements(1, 4))
    assert s.contains_all([1, 2])
    assert not s.contains_all([1, 4])
    assert s.contains_all(iter([1, 2]))
    assert not s.contains_all(iter([1, 4]))


def test_contains_any_from():
    s = Set.from_elements(1, 2, 3)
    assert s.contains_any(1, 4)
    assert not s.contains_any(4, 5)
    assert s.contains_any_from(Set.from_elements(1, 4))
    assert not s.contains_any_from(Set.from_elements(4, 5))
    assert s.contains_any_from([1, 4])
    assert not s.contains_any_from([4, 5])
    assert s.contains_any_from(iter([1, 4]))
    assert not s.contains_any_from(iter([4, 5]))


def test_len_and_equal():
    s1 = Set.from_elements(1, 2, 3)
    assert len(s1) == 3
    assert s1.equal(Set.from_elements(1, 2, 3))
    assert not s1.equal(Set.from_elements(1, 2, 3, 4))
    assert s1 == Set.from_elements(3, 2, 1)


def test_clone_is_independent():
    s1 = Set.from_elements(1, 2, 3)
    s2 = s1.clone()
    assert s1.equal(s2)
    s2.add(4)
    assert not s1.contains(4)


def test_to_list_and_iteration():
    s = Set.from_elements(1, 2, 3)
    assert sorted(s.to_list()) == [1, 2, 3]
    assert sorted(s) == [1, 2, 3]


def test_subset_and_superset():
    s1 = Set.from_elements(1, 2, 3)
    s2 = Set.from_elements(1, 2, 3, 4)
    s3 = Set.from_elements(1, 2, 3)
    assert s1.is_subset_of(s2)
    assert not s2.is_subset_of(s1)
    assert not s1.is_superset_of(s2)
    assert s2.is_superset_of(s1)
    assert s1.is_proper_subset_of(s2)
    assert not s2.is_proper_subset_of(s1)
    assert not s1.is_proper_subset_of(s3)
    assert not s1.is_proper_superset_of(s2)
    assert s2.is_proper_superset_of(s1)
    assert not s1.is_proper_superset_of(s3)


def test_diff():
    s1 = Set.from_elements(1, 2, 3)
    s2 = Set.from_elements(1, 2, 3, 4)
    assert len(s1.diff(s2)) == 0
    diff = s2.diff(s1)
    assert sorted(diff) == [4]
    assert len(s2) == 4


def test_symmetric_diff():
    s1 = Set.from_elements(1, 2, 3, 4, 5)
    s2 = Set.from_elements(2, 4, 6)
    assert sorted(s1.symmetric_diff(s2)) == [1, 3, 5, 6]


def test_union():
    s1 = Set.from_elements(1, 2, 3)
    s2 = Set.from_elements(2, 3, 4)
    union = s1.union(s2)
    assert sorted(union) == [1, 2, 3, 4]
    assert len(s1) == 3


def test_filter():
    filtered = Set.from_elements(1, 2, 3, 4, 5).filter(_is_even)
    assert sorted(filtered) == [2, 4]


def test_predicate_queries():
    s = Set.from_elements(1, 2, 3, 4, 5)
    assert s.count(_is_even) == 2
    assert s.any_match(_is_even)
    assert not s.all_match(_is_even)
    assert Set().all_match(_is_even)
    assert not Set().any_match(_is_even)


def test_set_is_unhashable():
    with pytest.raises(TypeError):
        hash(Set.from_elements(1))