"""Core types and base classes for the mopla package."""

from mopla.core.coordinate import CoordinateType, Float32, Float64
from mopla.core.space import Point
from mopla.core.boundaries import Boundaries
from mopla.core.config import PlannerConfig
from mopla.core.base_collision_checker import BaseCollisionChecker
from mopla.core.base_optimizer import BaseOptimizer
from mopla.core.base_mp import BaseMotionPlanner
from mopla.core.exceptions import (
    CollisionError,
    InvalidConfigurationError,
    OutOfBoundsError,
    PlannerStateError,
    PlanningError,
    RoadmapConsistencyError,
    SetupError,
)

__all__ = [
    "CoordinateType",
    "Float32",
    "Float64",
    "Point",
    "Boundaries",
    "PlannerConfig",
    "BaseCollisionChecker",
    "BaseOptimizer",
    "BaseMotionPlanner",
    "PlanningError",
    "InvalidConfigurationError",
    "OutOfBoundsError",
    "CollisionError",
    "SetupError",
    "PlannerStateError",
    "RoadmapConsistencyError",
]
