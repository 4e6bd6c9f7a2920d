"""Base motion planner class."""

from abc import ABC, abstractmethod
from typing import List

from mopla.core.space import Point


class BaseMotionPlanner(ABC):
    """Abstract base class for motion planners."""

    @abstractmethod
    def init(self):
        """
        Validate the planning problem and seed the graph with start and goal.

        Raises:
            InvalidConfigurationError: If start or goal is outside the
                boundaries or in collision.
        """
        pass

    @abstractmethod
    def solve(self):
        """Grow the graph until the termination criterion is met."""
        pass

    @abstractmethod
    def is_solved(self) -> bool:
        """Return True if a path between start and goal is known."""
        pass

    @abstractmethod
    def get_solution_cost(self) -> float:
        """Return the cost of the current solution, or the coordinate MAX if unsolved."""
        pass

    @abstractmethod
    def get_solution_path(self) -> List[Point]:
        """Return the configurations of the current solution, empty if unsolved."""
        pass
