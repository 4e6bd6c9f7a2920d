"""Exceptions raised by the planning core."""


class PlanningError(Exception):
    """Base exception for all planning errors."""
    pass


class InvalidConfigurationError(PlanningError):
    """Raised when the start or goal configuration cannot be planned from."""
    pass


class OutOfBoundsError(InvalidConfigurationError):
    """Raised when the start or goal lies outside the boundaries."""
    pass


class CollisionError(InvalidConfigurationError):
    """Raised when the start or goal configuration is in collision."""
    pass


class SetupError(PlanningError):
    """Raised when a collaborator fails to initialize."""
    pass


class PlannerStateError(PlanningError):
    """Raised when a planner operation is called in the wrong state."""
    pass


class RoadmapConsistencyError(PlanningError):
    """Raised when the graph, key lookup and spatial index disagree."""
    pass
