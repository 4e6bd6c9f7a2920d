"""Planner parameters."""

from dataclasses import dataclass


@dataclass
class PlannerConfig:
    """Connection fan-out and termination threshold of a planner."""
    neighbor_count: int = 3
    max_graph_size: int = 25

    def __post_init__(self):
        if self.neighbor_count < 1:
            raise ValueError(f"neighbor_count must be positive, got {self.neighbor_count}")
        if self.max_graph_size < 1:
            raise ValueError(f"max_graph_size must be positive, got {self.max_graph_size}")
