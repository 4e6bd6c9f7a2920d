"""Collision checker implementations."""

from mopla.collision.naive_checker import NaiveCollisionChecker
from mopla.collision.polygon_checker import PolygonCollisionChecker

__all__ = ["NaiveCollisionChecker", "PolygonCollisionChecker"]
