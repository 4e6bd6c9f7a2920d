import pytest

from mopla import PRM, RRT, Boundaries, EuclideanOptimizer, NaiveCollisionChecker, PlannerConfig, Point, ProblemDefinition
from mopla.core import CollisionError


@pytest.fixture
def problem(boundaries, naive_checker, optimizer, start, goal):
    planner = PRM(boundaries, naive_checker, optimizer)
    return ProblemDefinition(start, goal, boundaries, optimizer, naive_checker, planner)


def test_solve_sets_up_planner(problem, start, goal):
    problem.solve()
    assert problem.ready
    assert problem.is_solved()
    assert 3.0 < problem.get_solution_cost() < 6.0
    path = problem.get_solution_path()
    assert path[0] == start
    assert path[-1] == goal


def test_statistics(problem):
    problem.solve()
    stats = problem.get_statistics()
    assert stats["nodes"] == 25
    assert stats["edges"] > 0
    assert stats["solved"]


def test_changing_goal_requires_setup(problem):
    problem.solve()
    problem.set_goal(Point(1.5, 1.5))
    assert not problem.ready
    problem.solve()
    assert problem.get_solution_path()[-1] == Point(1.5, 1.5)


def test_invalid_goal(problem, obstacle_checker):
    problem.collision_checker = obstacle_checker
    problem.set_goal(Point(1.5, 1.5))
    with pytest.raises(CollisionError):
        problem.solve()


def test_works_with_rrt(boundaries, naive_checker, optimizer, start, goal):
    planner = RRT(Boundaries(0.0, 3.0, 0.0, 3.0, seed=2), NaiveCollisionChecker())
    problem = ProblemDefinition(start, goal, boundaries, optimizer, naive_checker, planner)
    problem.solve()
    assert problem.is_solved()
    assert planner.boundaries is boundaries
