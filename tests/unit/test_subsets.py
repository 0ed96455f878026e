from __future__ import annotations

from math import comb

import pytest

from mathsets.combinatorics import (
    ElementNotFoundError,
    InvalidArgumentError,
    count_subsets_of_size,
    iter_subsets_of_size,
    iter_subsets_of_size_containing,
    subsets_of_size,
    subsets_of_size_containing,
)
from mathsets.sets import Set


def test_t211_pairs_of_four_elements_in_position_order():
    subsets = subsets_of_size(Set([1, 2, 3, 4]), 2)

    assert [subset.to_list() for subset in subsets] == [
        [1, 2],
        [1, 3],
        [1, 4],
        [2, 3],
        [2, 4],
        [3, 4],
    ]
    assert all(isinstance(subset, Set) for subset in subsets)


def test_t212_order_follows_backing_order_not_value():
    subsets = subsets_of_size(Set([3, 1, 2]), 2)

    assert [subset.to_list() for subset in subsets] == [[3, 1], [3, 2], [1, 2]]


@pytest.mark.parametrize("n", range(0, 7))
def test_t213_count_matches_binomial(n):
    source = Set(range(6))
    subsets = subsets_of_size(source, n)

    assert len(subsets) == comb(6, n)
    assert count_subsets_of_size(source, n) == comb(6, n)
    for i, subset in enumerate(subsets):
        assert subset.cardinality == n
        assert subset.is_subset_of(source)
        assert all(subset != other for other in subsets[i + 1 :])


def test_t214_boundary_sizes():
    source = Set(["x", "y", "z"])

    empty_only = subsets_of_size(source, 0)
    assert len(empty_only) == 1
    assert empty_only[0].cardinality == 0

    whole = subsets_of_size(source, 3)
    assert len(whole) == 1
    assert whole[0] == source
    assert whole[0] is not source


def test_t215_results_do_not_alias_the_source():
    source = Set([1, 2, 3])
    (whole,) = subsets_of_size(source, 3)
    whole.add(4)

    assert source.to_list() == [1, 2, 3]


def test_t216_invalid_sizes_raise_without_mutating_source():
    source = Set([1, 2, 3])

    with pytest.raises(InvalidArgumentError, match="greater than"):
        subsets_of_size(source, 4)
    with pytest.raises(InvalidArgumentError):
        subsets_of_size(source, -1)

    assert source.to_list() == [1, 2, 3]


def test_t217_lazy_variant_validates_on_call():
    with pytest.raises(InvalidArgumentError):
        iter_subsets_of_size(Set([1]), 2)

    lazy = iter_subsets_of_size(Set(range(20)), 10)
    assert next(lazy).to_list() == list(range(10))


def test_t221_required_elements():
    subsets = subsets_of_size_containing(Set([1, 2, 3, 4, 5]), 3, [2, 4])

    assert [subset.to_list() for subset in subsets] == [[1, 2, 4], [3, 2, 4], [5, 2, 4]]
    assert subsets == [Set([1, 2, 4]), Set([2, 3, 4]), Set([2, 4, 5])]


def test_t222_required_order_is_appended_as_given():
    subsets = subsets_of_size_containing(Set(["a", "b", "c", "d"]), 3, ["d", "a"])

    assert [subset.to_list() for subset in subsets] == [["b", "d", "a"], ["c", "d", "a"]]


def test_t223_required_fills_whole_subset():
    subsets = subsets_of_size_containing(Set([1, 2, 3]), 2, [3, 1])

    assert [subset.to_list() for subset in subsets] == [[3, 1]]


def test_t224_required_and_size_equal_to_cardinality():
    subsets = subsets_of_size_containing(Set([1, 2, 3]), 3, [2])

    assert [subset.to_list() for subset in subsets] == [[1, 3, 2]]


def test_t225_missing_required_element_raises():
    with pytest.raises(ElementNotFoundError, match="9"):
        subsets_of_size_containing(Set([1, 2, 3]), 2, [9])


def test_t226_repeated_required_element_needs_distinct_positions():
    with pytest.raises(ElementNotFoundError):
        subsets_of_size_containing(Set([1, 2, 3]), 2, [1, 1])


def test_t227_required_size_violations_raise():
    source = Set([1, 2, 3])

    with pytest.raises(InvalidArgumentError):
        subsets_of_size_containing(source, 1, [1, 2])
    with pytest.raises(InvalidArgumentError):
        subsets_of_size_containing(source, 4, [1])
    with pytest.raises(InvalidArgumentError):
        iter_subsets_of_size_containing(source, 4, [1])


def test_t228_count_with_required_elements():
    source = Set([1, 2, 3, 4, 5])

    assert count_subsets_of_size(source, 3, [2, 4]) == 3
    assert count_subsets_of_size(source, 2, [2, 4]) == 1
    with pytest.raises(ElementNotFoundError):
        count_subsets_of_size(source, 3, [6])
    with pytest.raises(InvalidArgumentError):
        count_subsets_of_size(source, 1, [2, 4])
