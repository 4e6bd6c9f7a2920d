import numpy as np
import pytest

from mopla.core import CoordinateType, Float32, Float64


def test_float64_constants():
    assert Float64.MAX == np.finfo(np.float64).max
    assert Float64.EPSILON == np.finfo(np.float64).eps
    assert Float64.DEFAULT == 0.0


def test_float32_constants():
    assert Float32.MAX == float(np.finfo(np.float32).max)
    assert Float32.EPSILON == float(np.finfo(np.float32).eps)
    assert Float32.MAX < Float64.MAX


def test_cast_rounds_to_precision():
    assert Float64.cast(0.1) == 0.1
    assert Float32.cast(0.1) == float(np.float32(0.1))
    assert Float32.cast(0.1) != 0.1
    assert isinstance(Float32.cast(1), float)


def test_sample_in_half_open_range():
    rng = np.random.default_rng(3)
    for _ in range(200):
        value = Float32.sample(rng, 1.0, 2.0)
        assert 1.0 <= value <= 2.0


def test_rejects_integer_dtype():
    with pytest.raises(TypeError):
        CoordinateType("int", np.int64)


def test_equality_by_dtype():
    assert CoordinateType("double", np.float64) == Float64
    assert Float32 != Float64


class _FixedDraw:
    def __init__(self, value):
        self.value = value

    def uniform(self, low, high):
        return self.value


def test_sample_never_returns_upper_bound():
    # Largest float64 below 2.0 rounds up to 2.0 in float32
    draw = _FixedDraw(np.nextafter(2.0, 0.0))
    value = Float32.sample(draw, 1.0, 2.0)
    assert value < 2.0
    assert value == float(np.nextafter(np.float32(2.0), np.float32(1.0)))
    assert Float64.sample(draw, 1.0, 2.0) < 2.0
