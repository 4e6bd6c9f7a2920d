"""Euclidean distance edge costs."""

from mopla.core.base_optimizer import BaseOptimizer, WeightedEdge
from mopla.core.space import Point


class EuclideanOptimizer(BaseOptimizer):
    """Cost of an edge is the straight-line distance between its endpoints."""

    def edge_cost(self, begin: Point, end: Point) -> WeightedEdge:
        return begin, end, begin.euclidean_distance(end)


DefaultOptimizer = EuclideanOptimizer
