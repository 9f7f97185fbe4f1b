"""Tests for the ready-made problems, the Problem adapters and sanity_check_problem."""
import pytest

from pathsearch import astar, bfs, dijkstra
from pathsearch.core.problem import heuristic_of, unit_successors, weighted_successors
from pathsearch.problems.checks import sanity_check_problem
from pathsearch.problems.grid import GridProblem, make_grid_problem
from pathsearch.problems.romania import ROMANIA, RomaniaProblem, romania_problem


class LineProblem:
    """0 -> 1 -> ... -> n with a configurable step cost."""

    def __init__(self, n, cost=1):
        self.n = n
        self.cost = cost

    def initial_state(self):
        return 0

    def is_goal(self, s):
        return s == self.n

    def actions(self, s):
        return ["step"] if s < self.n else []

    def result(self, s, a):
        return s + 1

    def step_cost(self, s, a, s2):
        return self.cost


class TestGrid:
    """Tests for GridProblem."""

    def test_parse(self):
        p = GridProblem.parse("""
            S.#
            ..G
        """)
        assert (p.rows, p.cols) == (2, 3)
        assert p.start == (0, 0) and p.goal == (1, 2)
        assert p.walls == {(0, 2)}

    def test_parse_requires_start_and_goal(self):
        with pytest.raises(ValueError):
            GridProblem.parse("S..")

    def test_start_on_wall(self):
        with pytest.raises(ValueError):
            GridProblem(3, 3, (1, 1), (2, 2), walls=[(1, 1)])

    def test_actions_respect_walls_and_bounds(self):
        p = GridProblem(2, 2, (0, 0), (1, 1), walls=[(0, 1)])
        assert list(p.actions((0, 0))) == ["Down"]

    def test_example_shortest_path(self):
        p = make_grid_problem()
        path = bfs([p.initial_state()], unit_successors(p), p.is_goal)
        assert len(path) - 1 == 10
        _, cost = astar(p.initial_state(), weighted_successors(p), heuristic_of(p), p.is_goal)
        assert cost == 10


class TestRomania:
    """Tests for the Romania map and RomaniaProblem."""

    def test_roads_are_symmetric(self):
        for city, roads in ROMANIA.graph.items():
            for other, dist in roads.items():
                assert ROMANIA.graph[other][city] == dist

    def test_unknown_city(self):
        with pytest.raises(ValueError):
            RomaniaProblem("Arad", "Atlantis")

    def test_adapters(self):
        p = romania_problem()
        assert dict(weighted_successors(p)("Arad")) == {"Zerind": 75, "Sibiu": 140, "Timisoara": 118}
        assert heuristic_of(p)("Arad") == 366
        path, cost = dijkstra([p.initial_state()], weighted_successors(p), p.is_goal)
        assert cost == 418
        assert path[-1] == "Bucharest"

    def test_heuristic_only_towards_bucharest(self):
        p = romania_problem("Bucharest", "Arad")
        assert p.heuristic("Sibiu") == 0
        _, cost = astar("Bucharest", ROMANIA.roads, p.heuristic, p.is_goal)
        assert cost == 418

    def test_heuristic_defaults_to_zero(self):
        assert heuristic_of(LineProblem(3))(2) == 0


class TestSanityCheck:
    """Tests for sanity_check_problem."""

    def test_ok(self):
        assert sanity_check_problem(LineProblem(4)) == "OK: visited 5 states; no None or negative costs."

    def test_state_cap(self):
        assert "visited 3 states" in sanity_check_problem(LineProblem(100), max_states=3)

    def test_negative_cost(self):
        with pytest.raises(ValueError, match="negative"):
            sanity_check_problem(LineProblem(4, cost=-1))

    def test_missing_cost(self):
        with pytest.raises(ValueError, match="None"):
            sanity_check_problem(LineProblem(4, cost=None))

    def test_builtin_problems(self):
        for p in (make_grid_problem(), romania_problem()):
            assert sanity_check_problem(p).startswith("OK")
