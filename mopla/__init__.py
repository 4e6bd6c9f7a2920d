"""
mopla - sampling-based motion planning in 2-D continuous spaces.
"""

from mopla.core import Boundaries, Float32, Float64, PlannerConfig, Point
from mopla.collision import NaiveCollisionChecker, PolygonCollisionChecker
from mopla.optimizers import DefaultOptimizer, EuclideanOptimizer
from mopla.planners import PRM, PRMStar, RRT, PlannerStatus
from mopla.problem import ProblemDefinition

__version__ = "0.1.0"

__all__ = [
    "Point",
    "Boundaries",
    "Float32",
    "Float64",
    "PlannerConfig",
    "NaiveCollisionChecker",
    "PolygonCollisionChecker",
    "EuclideanOptimizer",
    "DefaultOptimizer",
    "PRM",
    "PRMStar",
    "RRT",
    "PlannerStatus",
    "ProblemDefinition",
]
