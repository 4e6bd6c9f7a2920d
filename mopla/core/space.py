"""2-D configurations."""

import numpy as np

from mopla.core.coordinate import CoordinateType, Float64


class Point:
    """Immutable 2-D configuration with epsilon-tolerant equality.

    Two points compare equal when both coordinates differ by less than the
    coordinate type's epsilon. Use ``key`` for dictionary lookups; points
    themselves are not hashable.
    """

    __slots__ = ("_x", "_y", "_coord_type")

    def __init__(self, x=None, y=None, coord_type: CoordinateType = Float64):
        self._coord_type = coord_type
        self._x = coord_type.cast(coord_type.DEFAULT if x is None else x)
        self._y = coord_type.cast(coord_type.DEFAULT if y is None else y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def coord_type(self) -> CoordinateType:
        return self._coord_type

    @property
    def key(self) -> str:
        """Canonical key used to deduplicate roadmap insertions."""
        return self.to_wkt()

    def to_wkt(self) -> str:
        return f"POINT({self._x!r} {self._y!r})"

    def euclidean_distance(self, other: "Point") -> float:
        return self._coord_type.cast(np.hypot(self._x - other.x, self._y - other.y))

    def as_array(self) -> np.ndarray:
        return np.array([self._x, self._y], dtype=self._coord_type.dtype)

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        eps = self._coord_type.EPSILON
        return abs(self._x - other.x) < eps and abs(self._y - other.y) < eps

    __hash__ = None

    def __repr__(self) -> str:
        return f"Point({self._x!r}, {self._y!r})"
