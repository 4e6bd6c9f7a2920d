"""Motion planning implementations."""

from mopla.planners.roadmap_planner import PlannerStatus, RoadmapPlanner
from mopla.planners.prm import PRM
from mopla.planners.prm_star import PRMStar
from mopla.planners.rrt import RRT
from mopla.planners.termination import MaxGraphSizeTermination

__all__ = ["PRM", "PRMStar", "RRT", "RoadmapPlanner", "PlannerStatus", "MaxGraphSizeTermination"]
