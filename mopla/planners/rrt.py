"""Rapidly-exploring random tree planner."""

from typing import Optional

from mopla.core.base_collision_checker import BaseCollisionChecker
from mopla.core.base_optimizer import BaseOptimizer
from mopla.core.boundaries import Boundaries
from mopla.core.config import PlannerConfig
from mopla.core.space import Point
from mopla.optimizers.euclidean_optimizer import EuclideanOptimizer
from mopla.planners.roadmap_planner import RoadmapPlanner


class RRT(RoadmapPlanner):
    """
    Rapidly-exploring Random Tree (RRT) planner.

    Single query. Each accepted sample is linked to its nearest node, then
    goal and start are each linked to their own nearest node when the
    segment is free. Storage is a general graph, so branches reaching start
    and goal independently are joined by the shortest path search.

    LaValle, S. M. (1998), "Rapidly-exploring random trees: A new tool for
    path planning".
    """

    name = "RRT"

    def __init__(
        self,
        boundaries: Boundaries,
        collision_checker: BaseCollisionChecker,
        optimizer: Optional[BaseOptimizer] = None,
        config: Optional[PlannerConfig] = None,
        start: Optional[Point] = None,
        goal: Optional[Point] = None
    ):
        if optimizer is None:
            optimizer = EuclideanOptimizer()
        super().__init__(boundaries, collision_checker, optimizer, config, start, goal)

    def _step(self):
        while True:
            sample = self.boundaries.sample()
            nearest_id = self.roadmap.nearest(sample)
            nearest = self.roadmap.point(nearest_id)

            if nearest == sample:
                self.rejected_samples += 1
                continue
            if self.collision_checker.is_point_colliding(sample):
                self.rejected_samples += 1
                continue
            if self.collision_checker.is_segment_colliding(sample, nearest):
                self.rejected_samples += 1
                continue
            break

        node_id = self.roadmap.insert_node(sample)
        self._add_edge(node_id, nearest_id)

        self._splice(self._goal_id)
        self._splice(self._start_id)

    def _splice(self, endpoint_id: int):
        nearest_id = self.roadmap.nearest(self.roadmap.point(endpoint_id), exclude=endpoint_id)
        if nearest_id is not None:
            self._connect(endpoint_id, nearest_id)
