"""Termination criteria for the graph construction loop."""

from mopla.graph.roadmap import Roadmap


class MaxGraphSizeTermination:
    """Stops construction once the roadmap holds ``max_size`` nodes."""

    def __init__(self, max_size: int):
        self.max_size = max_size

    def is_met(self, roadmap: Roadmap) -> bool:
        return roadmap.node_count >= self.max_size
