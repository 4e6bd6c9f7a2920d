"""Base optimizer class."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Tuple

from mopla.core.space import Point

Edge = Tuple[Point, Point]
WeightedEdge = Tuple[Point, Point, float]


class BaseOptimizer(ABC):
    """Abstract base class for edge cost evaluators."""

    def init(self) -> bool:
        """Run once before any cost is requested. Returns False on failure."""
        return True

    @abstractmethod
    def edge_cost(self, begin: Point, end: Point) -> WeightedEdge:
        """Return the edge together with the cost of travelling along it."""
        pass

    def edge_costs(self, edges: Iterable[Edge]) -> List[WeightedEdge]:
        return [self.edge_cost(begin, end) for begin, end in edges]
