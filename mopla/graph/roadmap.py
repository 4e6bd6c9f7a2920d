"""Undirected weighted roadmap with canonical-key lookup and spatial index."""

from typing import Dict, Iterator, List, Optional, Tuple

from mopla.core.coordinate import CoordinateType, Float64
from mopla.core.exceptions import RoadmapConsistencyError
from mopla.core.space import Point
from mopla.graph.spatial_index import SpatialIndex


class Roadmap:
    """Graph of configurations and weighted connections.

    Nodes are only ever added through ``insert_node``, which keeps the node
    list, the canonical-key lookup and the spatial index in step. Node ids
    are consecutive integers in insertion order.
    """

    def __init__(self, coord_type: CoordinateType = Float64):
        self.coord_type = coord_type
        self._points: List[Point] = []
        self._adjacency: List[Dict[int, float]] = []
        self._edge_count = 0
        self._lookup: Dict[str, int] = {}
        self._index = SpatialIndex()

    @property
    def node_count(self) -> int:
        return len(self._points)

    @property
    def edge_count(self) -> int:
        return self._edge_count

    @property
    def lookup_size(self) -> int:
        return len(self._lookup)

    @property
    def index_size(self) -> int:
        return len(self._index)

    def __len__(self) -> int:
        return len(self._points)

    def insert_node(self, point: Point) -> int:
        """
        Add a configuration to the roadmap.

        Returns:
            The id of the new node, or of the node already holding an equal
            configuration, in which case nothing is modified.
        """
        point = self.as_point(point)
        existing = self.node_id(point)
        if existing is not None:
            return existing

        node_id = len(self._points)
        self._points.append(point)
        self._adjacency.append({})
        self._lookup[point.key] = node_id
        self._index.insert(point.x, point.y)
        return node_id

    def insert_edge(self, a: int, b: int, weight: float) -> bool:
        """Connect two existing nodes. Self-loops and existing edges are ignored."""
        self._check_id(a)
        self._check_id(b)
        if a == b:
            return False
        if b in self._adjacency[a]:
            return False
        self._adjacency[a][b] = weight
        self._adjacency[b][a] = weight
        self._edge_count += 1
        return True

    def has_edge(self, a: int, b: int) -> bool:
        return b in self._adjacency[a]

    def edge_weight(self, a: int, b: int) -> Optional[float]:
        return self._adjacency[a].get(b)

    def as_point(self, point: Point) -> Point:
        """Return ``point`` expressed in the roadmap's coordinate type."""
        if point.coord_type == self.coord_type:
            return point
        return Point(point.x, point.y, self.coord_type)

    def node_id(self, point: Point) -> Optional[int]:
        point = self.as_point(point)
        node_id = self._lookup.get(point.key)
        if node_id is not None:
            return node_id
        # Within-epsilon configurations with a different key
        nearest = self._index.nearest(point.x, point.y)
        if nearest is not None and point == self._to_point(nearest):
            return self._resolve(nearest)
        return None

    def contains(self, point: Point) -> bool:
        return self.node_id(point) is not None

    def point(self, node_id: int) -> Point:
        self._check_id(node_id)
        return self._points[node_id]

    def neighbors(self, node_id: int) -> Iterator[Tuple[int, float]]:
        return iter(self._adjacency[node_id].items())

    def nodes(self) -> Iterator[Tuple[int, Point]]:
        return enumerate(self._points)

    def edges(self) -> Iterator[Tuple[int, int, float]]:
        for a, adjacent in enumerate(self._adjacency):
            for b, weight in adjacent.items():
                if a < b:
                    yield a, b, weight

    def k_nearest(self, point: Point, k: int) -> List[int]:
        """Return the ids of the ``k`` nodes closest to ``point``, closest first."""
        return [self._resolve(c) for c in self._index.k_nearest(point.x, point.y, k)]

    def nearest(self, point: Point, exclude: Optional[int] = None) -> Optional[int]:
        k = 1 if exclude is None else 2
        for node_id in self.k_nearest(point, k):
            if node_id != exclude:
                return node_id
        return None

    def _to_point(self, coords: Tuple[float, float]) -> Point:
        return Point(coords[0], coords[1], self.coord_type)

    def _resolve(self, coords: Tuple[float, float]) -> int:
        key = self._to_point(coords).key
        try:
            return self._lookup[key]
        except KeyError:
            raise RoadmapConsistencyError(
                f"Spatial index entry {key} has no node in the roadmap"
            ) from None

    def _check_id(self, node_id: int):
        if not 0 <= node_id < len(self._points):
            raise IndexError(f"Node id {node_id} is not in the roadmap")
