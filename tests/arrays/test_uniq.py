import pytest
from dashkit.arrays.relations import uniq


def test_uniq_of_unsorted_array():
    assert uniq([2, 1, 2]) == [2, 1]


def test_uniq_of_sorted_array():
    assert uniq([1, 2, 2]) == [1, 2]


def test_uniq_keeps_first_occurrence():
    assert uniq(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_uniq_empty():
    assert uniq([]) == []


def test_uniq_does_not_modify_input():
    array = [3, 3, 1]
    uniq(array)
    assert array == [3, 3, 1]


def test_uniq_rejects_unhashable_elements():
    with pytest.raises(TypeError):
        uniq([{"a": 1}, {"a": 1}])
