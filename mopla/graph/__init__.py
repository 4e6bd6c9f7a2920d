"""Roadmap storage and shortest path search."""

from mopla.graph.spatial_index import SpatialIndex
from mopla.graph.roadmap import Roadmap
from mopla.graph.search import astar

__all__ = ["SpatialIndex", "Roadmap", "astar"]
