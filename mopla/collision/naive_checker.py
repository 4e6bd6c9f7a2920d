"""Collision checker for obstacle-free spaces."""

from mopla.core.base_collision_checker import BaseCollisionChecker
from mopla.core.space import Point


class NaiveCollisionChecker(BaseCollisionChecker):
    """Reports every configuration and segment as collision-free."""

    def is_point_colliding(self, point: Point) -> bool:
        return False

    def is_segment_colliding(self, begin: Point, end: Point) -> bool:
        return False
