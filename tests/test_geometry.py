import math

import pytest

from aaxutils.geometry import magnitude


def test_pythagorean_triple():
    assert magnitude((3.0, 4.0, 0.0)) == 5.0


@pytest.mark.parametrize(
    "vector", [(1.0, 0.0, 0.0), (0.0, -1.0, 0.0), (0.0, 0.0, 1.0)]
)
def test_unit_vectors(vector):
    assert magnitude(vector) == 1.0


def test_zero_vector():
    assert magnitude([0.0, 0.0, 0.0]) == 0.0


@pytest.mark.parametrize("factor", [0.5, 2.0, 10.0, 150.0])
def test_scaling(factor):
    vector = (-1.0, 0.5, 0.5)
    scaled = tuple(c * factor for c in vector)
    assert magnitude(scaled) == pytest.approx(factor * magnitude(vector))


def test_sign_does_not_matter():
    assert magnitude((-150.0, 30.0, 15.0)) == magnitude((150.0, -30.0, -15.0))


def test_consistent_with_hypot():
    vector = (1000.0, 1000.0, -500.0)
    assert magnitude(vector) == pytest.approx(math.hypot(*vector))


def test_wrong_length_raises():
    with pytest.raises(ValueError):
        magnitude((1.0, 2.0))