from dashkit.functional.slicing import index_of, initial, tail


def test_initial():
    assert initial([1, 2, 3]) == [1, 2]
    assert initial([1, 2]) == [1]
    assert initial([1]) == []
    assert initial([]) == []


def test_tail():
    assert tail([1, 2, 3]) == [2, 3]
    assert tail([1, 2]) == [2]
    assert tail([1]) == []
    assert tail([]) == []


def test_slicing_returns_lists():
    assert initial((1, 2, 3)) == [1, 2]
    assert tail("abc") == ["b", "c"]


def test_index_of_first_match():
    assert index_of([1, 2, 3, 1, 2, 3], 3) == 2


def test_index_of_missing_element():
    assert index_of([1, 2, 3, 1, 2, 3], 10) is None
    assert index_of([], 1) is None
