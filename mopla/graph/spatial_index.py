"""Append-only nearest neighbour index over 2-D coordinates."""

from typing import List, Optional, Tuple

import numpy as np
from scipy.spatial import cKDTree


class SpatialIndex:
    """KD-tree backed point index supporting insertion.

    Inserted points land in an unindexed tail that is searched brute force;
    once the tail grows past ``rebuild_threshold`` the tree is rebuilt over
    every point.
    """

    def __init__(self, rebuild_threshold: int = 64):
        self.rebuild_threshold = rebuild_threshold
        self._coords: List[Tuple[float, float]] = []
        self._tree: Optional[cKDTree] = None
        self._indexed = 0

    def __len__(self) -> int:
        return len(self._coords)

    def insert(self, x: float, y: float):
        self._coords.append((x, y))
        if len(self._coords) - self._indexed > self.rebuild_threshold:
            self._rebuild()

    def _rebuild(self):
        self._tree = cKDTree(np.asarray(self._coords, dtype=np.float64))
        self._indexed = len(self._coords)

    def k_nearest(self, x: float, y: float, k: int) -> List[Tuple[float, float]]:
        """Return up to ``k`` stored coordinates ordered by distance to ``(x, y)``."""
        if k <= 0 or not self._coords:
            return []

        distances = []
        positions = []
        if self._tree is not None and self._indexed > 0:
            d, i = self._tree.query([x, y], k=min(k, self._indexed))
            distances.append(np.atleast_1d(d))
            positions.append(np.atleast_1d(i))

        if self._indexed < len(self._coords):
            tail = np.asarray(self._coords[self._indexed:], dtype=np.float64)
            distances.append(np.hypot(tail[:, 0] - x, tail[:, 1] - y))
            positions.append(np.arange(self._indexed, len(self._coords)))

        distances = np.concatenate(distances)
        positions = np.concatenate(positions)
        order = np.argsort(distances, kind="stable")[:k]
        return [self._coords[int(p)] for p in positions[order]]

    def nearest(self, x: float, y: float) -> Optional[Tuple[float, float]]:
        result = self.k_nearest(x, y, 1)
        return result[0] if result else None
