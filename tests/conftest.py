import pytest

from mopla import Boundaries, EuclideanOptimizer, NaiveCollisionChecker, Point, PolygonCollisionChecker
from mopla.core import BaseCollisionChecker

SQUARE_OBSTACLE = [(1.0, 1.0), (2.0, 1.0), (2.0, 2.0), (1.0, 2.0)]


class EdgeBlockingCollisionChecker(BaseCollisionChecker):
    """Accepts every configuration but rejects every connection."""

    def is_point_colliding(self, point):
        return False

    def is_segment_colliding(self, begin, end):
        return True


class RecordingCollisionChecker(NaiveCollisionChecker):
    def __init__(self):
        self.points = []
        self.segments = []

    def is_point_colliding(self, point):
        self.points.append(point)
        return False

    def is_segment_colliding(self, begin, end):
        self.segments.append((begin.key, end.key))
        return False


@pytest.fixture
def boundaries():
    return Boundaries(0.0, 3.0, 0.0, 3.0, seed=0)


@pytest.fixture
def naive_checker():
    return NaiveCollisionChecker()


@pytest.fixture
def optimizer():
    return EuclideanOptimizer()


@pytest.fixture
def obstacle_checker():
    return PolygonCollisionChecker([SQUARE_OBSTACLE])


@pytest.fixture
def start():
    return Point(0.0, 0.0)


@pytest.fixture
def goal():
    return Point(3.0, 3.0)
