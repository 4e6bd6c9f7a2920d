"""Shared machinery of the graph-building planners."""

import enum
import logging
from abc import abstractmethod
from typing import Any, Dict, List, Optional

from mopla.core.base_collision_checker import BaseCollisionChecker
from mopla.core.base_mp import BaseMotionPlanner
from mopla.core.base_optimizer import BaseOptimizer
from mopla.core.boundaries import Boundaries
from mopla.core.config import PlannerConfig
from mopla.core.exceptions import (
    CollisionError,
    InvalidConfigurationError,
    OutOfBoundsError,
    PlannerStateError,
    SetupError,
)
from mopla.core.space import Point
from mopla.graph.roadmap import Roadmap
from mopla.graph.search import Solution, astar
from mopla.planners.termination import MaxGraphSizeTermination

logger = logging.getLogger(__name__)


class PlannerStatus(enum.Enum):
    """Planner lifecycle enumeration."""
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    GROWING = "growing"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class RoadmapPlanner(BaseMotionPlanner):
    """
    Base class for planners that grow a roadmap and search it with A*.

    Subclasses implement ``_step``, one iteration of graph growth. The
    solution is recomputed from the whole roadmap after every iteration and
    construction stops once the roadmap reaches ``config.max_graph_size``
    nodes.
    """

    name = "planner"
    default_config = PlannerConfig()

    def __init__(
        self,
        boundaries: Boundaries,
        collision_checker: BaseCollisionChecker,
        optimizer: BaseOptimizer,
        config: Optional[PlannerConfig] = None,
        start: Optional[Point] = None,
        goal: Optional[Point] = None
    ):
        self.boundaries = boundaries
        self.collision_checker = collision_checker
        self.optimizer = optimizer
        self.config = config if config is not None else PlannerConfig(
            self.default_config.neighbor_count, self.default_config.max_graph_size
        )
        self.start = start
        self.goal = goal

        self.coord_type = boundaries.coord_type
        self.roadmap = Roadmap(self.coord_type)
        self.termination = MaxGraphSizeTermination(self.config.max_graph_size)
        self.solution: Optional[Solution] = None
        self.status = PlannerStatus.UNINITIALIZED
        self.rejected_samples = 0

        self._start_id: Optional[int] = None
        self._goal_id: Optional[int] = None

    def set_start(self, start: Point):
        self.start = start
        self.status = PlannerStatus.UNINITIALIZED

    def set_goal(self, goal: Point):
        self.goal = goal
        self.status = PlannerStatus.UNINITIALIZED

    def set_boundaries(self, boundaries: Boundaries):
        self.boundaries = boundaries
        self.coord_type = boundaries.coord_type
        self.reset()

    def set_collision_checker(self, collision_checker: BaseCollisionChecker):
        self.collision_checker = collision_checker
        self.reset()

    def set_optimizer(self, optimizer: BaseOptimizer):
        self.optimizer = optimizer
        self.reset()

    def reset(self):
        """Discard the roadmap. Start and goal changes keep it for further queries."""
        self.roadmap = Roadmap(self.coord_type)
        self.solution = None
        self.rejected_samples = 0
        self._start_id = None
        self._goal_id = None
        self.status = PlannerStatus.UNINITIALIZED

    def init(self):
        if not self.collision_checker.init():
            raise SetupError("Collision checker could not be initialized")

        self.start = self._validate_endpoint("Start", self.start)
        self.goal = self._validate_endpoint("Goal", self.goal)

        if not self.optimizer.init():
            raise SetupError("Optimizer could not be initialized")

        reused = self.roadmap.node_count > 0
        self._start_id = self.roadmap.insert_node(self.start)
        self._goal_id = self.roadmap.insert_node(self.goal)
        if reused:
            logger.info(f"{self.name} reusing roadmap with {self.roadmap.node_count} nodes")
            self._attach_endpoints()

        self._check_solution()
        self.status = PlannerStatus.INITIALIZED
        logger.info(f"{self.name} is ready for planning from {self.start} to {self.goal}")

    def _validate_endpoint(self, label: str, point: Optional[Point]) -> Point:
        if point is None:
            raise InvalidConfigurationError(f"{label} is not set.")
        point = self.roadmap.as_point(point)
        if not self.boundaries.contains(point):
            raise OutOfBoundsError(f"{label} {point} is not inside {self.boundaries}.")
        if self.collision_checker.is_point_colliding(point):
            raise CollisionError(f"{label} {point} is in collision.")
        return point

    def solve(self):
        if self.status == PlannerStatus.UNINITIALIZED:
            raise PlannerStateError("init() must be called before solve()")

        self.status = PlannerStatus.GROWING
        logger.info(
            f"{self.name} growing roadmap (max size: {self.config.max_graph_size}, "
            f"neighbors: {self.config.neighbor_count})"
        )

        iteration = 0
        while True:
            iteration += 1
            self._step()
            self._check_solution()
            logger.debug(
                f"{self.name} iteration {iteration}, nodes: {self.roadmap.node_count}, "
                f"edges: {self.roadmap.edge_count}, cost: {self.get_solution_cost()}"
            )

            if self.termination.is_met(self.roadmap):
                logger.info(f"{self.name} termination criteria met after {iteration} iterations")
                break

        if self.is_solved():
            self.status = PlannerStatus.SOLVED
            logger.info(
                f"{self.name} path found with {len(self.solution[1])} waypoints, "
                f"cost: {self.get_solution_cost():.3f}"
            )
        else:
            self.status = PlannerStatus.EXHAUSTED
            logger.info(f"{self.name} failed to find a path to the goal")

    @abstractmethod
    def _step(self):
        """Add one configuration to the roadmap and connect it."""
        pass

    def _attach_endpoints(self):
        """Hook run by ``init()`` when start and goal join an existing roadmap."""
        pass

    def _check_solution(self):
        self.solution = astar(self.roadmap, self._start_id, self._goal_id)

    def _connect(self, a: int, b: int) -> bool:
        if a == b or self.roadmap.has_edge(a, b):
            return False
        if self.collision_checker.is_segment_colliding(self.roadmap.point(a), self.roadmap.point(b)):
            return False
        return self._add_edge(a, b)

    def _add_edge(self, a: int, b: int) -> bool:
        _, _, cost = self.optimizer.edge_cost(self.roadmap.point(a), self.roadmap.point(b))
        return self.roadmap.insert_edge(a, b, self.coord_type.cast(cost))

    def is_solved(self) -> bool:
        return self.solution is not None

    def get_solution_cost(self) -> float:
        if self.solution is None:
            return self.coord_type.MAX
        return self.solution[0]

    def get_solution_path(self) -> List[Point]:
        if self.solution is None:
            return []
        return [self.roadmap.point(node_id) for node_id in self.solution[1]]

    @property
    def graph(self) -> Roadmap:
        return self.roadmap

    @property
    def node_count(self) -> int:
        return self.roadmap.node_count

    @property
    def edge_count(self) -> int:
        return self.roadmap.edge_count

    def statistics(self) -> Dict[str, Any]:
        return {
            "planner": self.name,
            "nodes": self.roadmap.node_count,
            "edges": self.roadmap.edge_count,
            "solved": self.is_solved(),
            "cost": self.get_solution_cost(),
            "rejected_samples": self.rejected_samples,
        }
