import logging

from mopla import Boundaries, Float32, Point


def test_contains():
    bounds = Boundaries(0.0, 3.0, 0.0, 3.0)
    assert bounds.contains(Point(0.5, 2.5))
    assert not bounds.contains(Point(3.5, 2.5))


def test_contains_respects_lower_y():
    bounds = Boundaries(0.0, 3.0, 2.0, 3.0)
    assert not bounds.contains(Point(0.5, 0.0))
    assert bounds.contains(Point(0.5, 2.0))


def test_contains_is_closed():
    bounds = Boundaries(0.0, 3.0, 0.0, 3.0)
    assert bounds.contains(Point(0.0, 0.0))
    assert bounds.contains(Point(3.0, 3.0))


def test_samples_stay_in_range():
    bounds = Boundaries(0.0, 3.0, 0.0, 3.0, seed=11)
    for _ in range(1000):
        assert bounds.contains(bounds.sample())


def test_float32_samples_stay_in_range():
    bounds = Boundaries(-1.0, 1.0, 5.0, 6.0, coord_type=Float32, seed=2)
    for _ in range(1000):
        p = bounds.sample()
        assert p.coord_type == Float32
        assert bounds.contains(p)


def test_seeded_sampling_is_deterministic():
    a = Boundaries(0.0, 3.0, 0.0, 3.0, seed=5)
    b = Boundaries(0.0, 3.0, 0.0, 3.0, seed=5)
    assert [a.sample() for _ in range(10)] == [b.sample() for _ in range(10)]


def test_inverted_bounds_are_accepted(caplog):
    with caplog.at_level(logging.WARNING, logger="mopla"):
        bounds = Boundaries(3.0, 0.0, 0.0, 3.0, seed=1)
    assert "inverted" in caplog.text
    for _ in range(100):
        p = bounds.sample()
        assert 0.0 <= p.x <= 3.0
        assert not bounds.contains(p)
