"""Base collision checker class."""

from abc import ABC, abstractmethod

import numpy as np

from mopla.core.space import Point


class BaseCollisionChecker(ABC):
    """Abstract base class for collision oracles.

    Implementations must be deterministic and free of side effects; planners
    never cache their answers.
    """

    segment_resolution: float = 0.01

    def init(self) -> bool:
        """Run once before any check. Returns False if the checker is unusable."""
        return True

    @abstractmethod
    def is_point_colliding(self, point: Point) -> bool:
        """Check if a configuration is in collision."""
        pass

    def is_segment_colliding(self, begin: Point, end: Point) -> bool:
        """
        Check if the straight segment between two configurations collides.

        The default interpolates the segment at ``segment_resolution`` and
        checks every intermediate configuration.
        """
        steps = max(1, int(np.ceil(begin.euclidean_distance(end) / self.segment_resolution)))
        for i in range(steps + 1):
            alpha = i / steps
            config = Point(
                (1 - alpha) * begin.x + alpha * end.x,
                (1 - alpha) * begin.y + alpha * end.y,
                begin.coord_type,
            )
            if self.is_point_colliding(config):
                return True
        return False
