"""Probabilistic roadmap planner."""

from typing import Optional

from mopla.core.base_collision_checker import BaseCollisionChecker
from mopla.core.base_optimizer import BaseOptimizer
from mopla.core.boundaries import Boundaries
from mopla.core.config import PlannerConfig
from mopla.core.space import Point
from mopla.planners.roadmap_planner import RoadmapPlanner


class PRM(RoadmapPlanner):
    """
    Probabilistic Roadmap (PRM) planner.

    Every iteration inserts one collision-free sample and connects it to its
    ``neighbor_count`` nearest nodes. Start and goal are ordinary roadmap
    nodes, so the roadmap can answer further queries by setting new
    endpoints and calling ``init()`` again.

    Kavraki, L. E.; Svestka, P.; Latombe, J.-C.; Overmars, M. H. (1996),
    "Probabilistic roadmaps for path planning in high-dimensional
    configuration spaces".
    """

    name = "PRM"

    def __init__(
        self,
        boundaries: Boundaries,
        collision_checker: BaseCollisionChecker,
        optimizer: BaseOptimizer,
        config: Optional[PlannerConfig] = None,
        start: Optional[Point] = None,
        goal: Optional[Point] = None
    ):
        super().__init__(boundaries, collision_checker, optimizer, config, start, goal)

    def _step(self):
        node_id = self._add_random_node()
        self._connect_to_neighbors(node_id)

    def _add_random_node(self) -> int:
        while True:
            candidate = self.boundaries.sample()
            if self.collision_checker.is_point_colliding(candidate):
                self.rejected_samples += 1
                continue
            if self.roadmap.contains(candidate):
                self.rejected_samples += 1
                continue
            return self.roadmap.insert_node(candidate)

    def neighbor_count(self) -> int:
        return self.config.neighbor_count

    def _connect_to_neighbors(self, node_id: int):
        point = self.roadmap.point(node_id)
        # The node itself is the closest hit
        for neighbor_id in self.roadmap.k_nearest(point, self.neighbor_count()):
            if neighbor_id == node_id:
                continue
            self._connect(node_id, neighbor_id)

    def _attach_endpoints(self):
        self._connect_to_neighbors(self._start_id)
        self._connect_to_neighbors(self._goal_id)
