"""Shortest path search over a roadmap."""

import heapq
import itertools
from typing import Callable, List, Optional, Tuple

from mopla.graph.roadmap import Roadmap

Solution = Tuple[float, List[int]]


def astar(
    roadmap: Roadmap,
    start: int,
    goal: int,
    heuristic: Optional[Callable[[int], float]] = None
) -> Optional[Solution]:
    """
    Find the minimum cost path between two nodes.

    With the default zero heuristic this is a uniform-cost search. Edge
    costs are the stored edge weights.

    Returns:
        ``(cost, node_ids)`` from start to goal inclusive, or None if the
        goal is unreachable.
    """
    if heuristic is None:
        heuristic = _zero_heuristic

    counter = itertools.count()
    open_set = [(heuristic(start), next(counter), start)]
    g_score = {start: 0.0}
    came_from = {}
    closed = set()

    while open_set:
        _, _, current = heapq.heappop(open_set)
        if current == goal:
            return g_score[current], _reconstruct(came_from, current)
        if current in closed:
            continue
        closed.add(current)

        for neighbor, weight in roadmap.neighbors(current):
            if neighbor in closed:
                continue
            tentative = g_score[current] + weight
            if tentative < g_score.get(neighbor, float("inf")):
                g_score[neighbor] = tentative
                came_from[neighbor] = current
                heapq.heappush(
                    open_set, (tentative + heuristic(neighbor), next(counter), neighbor)
                )
    return None


def _zero_heuristic(node_id: int) -> float:
    return 0.0


def _reconstruct(came_from: dict, current: int) -> List[int]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path
