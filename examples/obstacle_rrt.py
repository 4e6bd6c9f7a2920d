"""Example comparing RRT and PRM* around a square obstacle."""

import logging

from mopla import (
    PRMStar,
    RRT,
    Boundaries,
    EuclideanOptimizer,
    PlannerConfig,
    Point,
    PolygonCollisionChecker,
    ProblemDefinition,
)

OBSTACLE = [(1.0, 1.0), (2.0, 1.0), (2.0, 2.0), (1.0, 2.0)]


def main():
    logging.basicConfig(level=logging.INFO)

    start = Point(0.0, 0.0)
    goal = Point(3.0, 3.0)
    checker = PolygonCollisionChecker([OBSTACLE])
    optimizer = EuclideanOptimizer()

    planners = [
        RRT(Boundaries(0.0, 3.0, 0.0, 3.0, seed=1), checker, config=PlannerConfig(max_graph_size=300)),
        PRMStar(Boundaries(0.0, 3.0, 0.0, 3.0, seed=1), checker, optimizer,
                config=PlannerConfig(neighbor_count=5, max_graph_size=300)),
    ]

    for planner in planners:
        problem = ProblemDefinition(start, goal, planner.boundaries, optimizer, checker, planner)
        problem.solve()
        stats = problem.get_statistics()
        print(f"\n{stats['planner']}: solved={stats['solved']}, cost={stats['cost']:.3f}, "
              f"nodes={stats['nodes']}, edges={stats['edges']}")


if __name__ == "__main__":
    main()
