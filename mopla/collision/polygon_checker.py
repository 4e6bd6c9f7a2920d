"""Collision checking against polygonal obstacles."""

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from mopla.core.base_collision_checker import BaseCollisionChecker
from mopla.core.space import Point


class PolygonCollisionChecker(BaseCollisionChecker):
    """
    Collision checker for a set of simple polygons.

    A configuration collides when it lies strictly inside a polygon. A
    segment collides when it touches or crosses a polygon edge, or when one
    of its endpoints is inside a polygon.

    Args:
        polygons: Iterable of vertex lists, e.g. ``[[(1, 1), (2, 1), (2, 2), (1, 2)]]``.
            Rings are closed implicitly.
    """

    def __init__(self, polygons: Iterable[Sequence[Tuple[float, float]]]):
        self.polygons: List[np.ndarray] = []
        for vertices in polygons:
            ring = np.asarray(vertices, dtype=np.float64)
            if ring.ndim != 2 or ring.shape[1] != 2 or len(ring) < 3:
                raise ValueError("Polygons need at least three 2-D vertices")
            self.polygons.append(ring)

    def is_point_colliding(self, point: Point) -> bool:
        return any(self._is_inside(ring, point.x, point.y) for ring in self.polygons)

    def is_segment_colliding(self, begin: Point, end: Point) -> bool:
        if self.is_point_colliding(begin) or self.is_point_colliding(end):
            return True
        a = np.array([begin.x, begin.y])
        b = np.array([end.x, end.y])
        return any(self._crosses_boundary(ring, a, b) for ring in self.polygons)

    @staticmethod
    def _edges(ring: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        return ring, np.roll(ring, -1, axis=0)

    @classmethod
    def _is_inside(cls, ring: np.ndarray, x: float, y: float) -> bool:
        starts, ends = cls._edges(ring)

        # Points on the boundary are not inside
        if cls._on_boundary(starts, ends, np.array([x, y])).any():
            return False

        # Even-odd ray casting along +x
        y1, y2 = starts[:, 1], ends[:, 1]
        straddles = (y1 > y) != (y2 > y)
        with np.errstate(divide="ignore", invalid="ignore"):
            x_cross = starts[:, 0] + (y - y1) * (ends[:, 0] - starts[:, 0]) / (y2 - y1)
        return bool(np.count_nonzero(straddles & (x < x_cross)) % 2)

    @staticmethod
    def _on_boundary(starts: np.ndarray, ends: np.ndarray, p: np.ndarray, tol: float = 1e-12) -> np.ndarray:
        d = ends - starts
        cross = d[:, 0] * (p[1] - starts[:, 1]) - d[:, 1] * (p[0] - starts[:, 0])
        within_x = (np.minimum(starts[:, 0], ends[:, 0]) - tol <= p[0]) & (p[0] <= np.maximum(starts[:, 0], ends[:, 0]) + tol)
        within_y = (np.minimum(starts[:, 1], ends[:, 1]) - tol <= p[1]) & (p[1] <= np.maximum(starts[:, 1], ends[:, 1]) + tol)
        return (np.abs(cross) <= tol) & within_x & within_y

    @classmethod
    def _crosses_boundary(cls, ring: np.ndarray, a: np.ndarray, b: np.ndarray) -> bool:
        starts, ends = cls._edges(ring)
        d1 = _orientation(a, b, starts)
        d2 = _orientation(a, b, ends)
        d3 = _orientation(starts, ends, a)
        d4 = _orientation(starts, ends, b)

        proper = (d1 * d2 < 0) & (d3 * d4 < 0)
        if proper.any():
            return True

        # Touching: an endpoint of one segment lies on the other
        touching = (
            ((d1 == 0) & _within_box(a, b, starts))
            | ((d2 == 0) & _within_box(a, b, ends))
            | ((d3 == 0) & _within_box(starts, ends, a))
            | ((d4 == 0) & _within_box(starts, ends, b))
        )
        return bool(touching.any())


def _orientation(p: np.ndarray, q: np.ndarray, r: np.ndarray) -> np.ndarray:
    """Sign of the cross product (q - p) x (r - p), broadcast over rows."""
    value = (q[..., 0] - p[..., 0]) * (r[..., 1] - p[..., 1]) - (q[..., 1] - p[..., 1]) * (r[..., 0] - p[..., 0])
    return np.sign(value)


def _within_box(p: np.ndarray, q: np.ndarray, r: np.ndarray) -> np.ndarray:
    return (
        (np.minimum(p[..., 0], q[..., 0]) <= r[..., 0])
        & (r[..., 0] <= np.maximum(p[..., 0], q[..., 0]))
        & (np.minimum(p[..., 1], q[..., 1]) <= r[..., 1])
        & (r[..., 1] <= np.maximum(p[..., 1], q[..., 1]))
    )
