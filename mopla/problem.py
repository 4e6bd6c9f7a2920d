"""Problem definition tying a planner to its collaborators."""

import logging
from typing import Any, Dict, List

from mopla.core.base_collision_checker import BaseCollisionChecker
from mopla.core.base_optimizer import BaseOptimizer
from mopla.core.boundaries import Boundaries
from mopla.core.space import Point
from mopla.planners.roadmap_planner import RoadmapPlanner

logger = logging.getLogger(__name__)


class ProblemDefinition:
    """
    Collects start, goal, boundaries and collaborators for one planner.

    The planner is configured from the problem on ``setup()``, which is run
    implicitly by ``solve()`` whenever the problem changed.
    """

    def __init__(
        self,
        start: Point,
        goal: Point,
        boundaries: Boundaries,
        optimizer: BaseOptimizer,
        collision_checker: BaseCollisionChecker,
        planner: RoadmapPlanner
    ):
        self.start = start
        self.goal = goal
        self.boundaries = boundaries
        self.optimizer = optimizer
        self.collision_checker = collision_checker
        self.planner = planner
        self.ready = False

    def set_start(self, start: Point):
        self.start = start
        self.ready = False

    def set_goal(self, goal: Point):
        self.goal = goal
        self.ready = False

    def set_planner(self, planner: RoadmapPlanner):
        self.planner = planner
        self.ready = False

    def setup(self):
        # Swapping a collaborator discards the roadmap, so only replace changed ones
        if self.planner.boundaries is not self.boundaries:
            self.planner.set_boundaries(self.boundaries)
        if self.planner.collision_checker is not self.collision_checker:
            self.planner.set_collision_checker(self.collision_checker)
        if self.planner.optimizer is not self.optimizer:
            self.planner.set_optimizer(self.optimizer)
        self.planner.set_start(self.start)
        self.planner.set_goal(self.goal)
        self.planner.init()
        self.ready = True

    def solve(self):
        if not self.ready:
            self.setup()
        self.planner.solve()

    def is_solved(self) -> bool:
        return self.planner.is_solved()

    def get_solution_cost(self) -> float:
        return self.planner.get_solution_cost()

    def get_solution_path(self) -> List[Point]:
        return self.planner.get_solution_path()

    def get_statistics(self) -> Dict[str, Any]:
        stats = self.planner.statistics()
        logger.info(f"Graph contains {stats['nodes']} nodes and {stats['edges']} edges")
        return stats
