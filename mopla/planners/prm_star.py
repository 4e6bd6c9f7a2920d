"""PRM* planner."""

from mopla.core.config import PlannerConfig
from mopla.planners.prm import PRM


class PRMStar(PRM):
    """
    PRM* planner.

    Same construction loop as PRM with a denser default roadmap, so the
    solution cost keeps improving as sampling continues.

    Karaman, S.; Frazzoli, E. (2011), "Sampling-based algorithms for optimal
    motion planning".
    """

    name = "PRM*"
    default_config = PlannerConfig(neighbor_count=10, max_graph_size=1000)
