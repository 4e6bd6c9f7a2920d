"""Example demonstrating PRM planning in an obstacle-free square."""

import logging
import time

from mopla import PRM, Boundaries, EuclideanOptimizer, NaiveCollisionChecker, PlannerConfig, Point


def main():
    logging.basicConfig(level=logging.INFO)

    print("Creating motion planner...")
    boundaries = Boundaries(0.0, 3.0, 0.0, 3.0, seed=42)
    planner = PRM(
        boundaries,
        NaiveCollisionChecker(),
        EuclideanOptimizer(),
        config=PlannerConfig(neighbor_count=3, max_graph_size=25),
    )
    planner.set_start(Point(0.0, 0.0))
    planner.set_goal(Point(3.0, 3.0))
    planner.init()

    print("\n" + "="*60)
    start = time.perf_counter()
    planner.solve()
    duration = time.perf_counter() - start
    print("="*60)

    print(f"\nTime elapsed: {duration:.4f}s")
    print(f"Graph contains {planner.node_count} nodes and {planner.edge_count} edges")

    if not planner.is_solved():
        print("\nFailed to find a path!")
        return

    print(f"Solution cost: {planner.get_solution_cost():.3f}")
    for point in planner.get_solution_path():
        print(f"  {point.to_wkt()}")


if __name__ == "__main__":
    main()
