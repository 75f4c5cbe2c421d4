import math

import pytest
from dashkit.functional.stats import mean


def test_mean_of_integers():
    assert mean([4, 2, 8, 6]) == 5.0


def test_mean_of_floats():
    assert mean([0.5, 1.5, 2.5]) == pytest.approx(1.5)


def test_mean_returns_python_float():
    assert isinstance(mean([1, 2]), float)


def test_mean_of_empty_is_nan():
    assert math.isnan(mean([]))
