import jax
import pytest
from dashkit.functional.sampling import sample, shuffle


@pytest.fixture
def key():
    return jax.random.PRNGKey(42)


def test_sample_returns_member(key):
    array = [1, 2, 3]
    assert sample(array, key) in array
    assert sample(array) in array


def test_sample_is_reproducible_with_key(key):
    array = list(range(100))
    assert sample(array, key) == sample(array, key)


def test_sample_empty():
    assert sample([]) is None


def test_shuffle_is_permutation(key):
    array = [1, 2, 3, 4]
    result = shuffle(array, key)
    assert len(result) == 4
    assert sorted(result) == array
    assert array == [1, 2, 3, 4]


def test_shuffle_is_reproducible_with_key(key):
    array = list(range(50))
    assert shuffle(array, key) == shuffle(array, key)


def test_shuffle_small_inputs():
    assert shuffle([]) == []
    assert shuffle(["x"]) == ["x"]
