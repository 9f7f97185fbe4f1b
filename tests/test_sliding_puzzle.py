"""Tests for the sliding puzzle board and its use as a heuristic search workload."""
import numpy as np
import pytest

from pathsearch import astar, bfs, idastar
from pathsearch.problems.sliding_puzzle import SlidingPuzzle, SlidingPuzzleProblem


def solve_with(engine, board):
    return engine(board, lambda b: b.moves(), lambda b: b.weight, lambda b: b.solved())


class TestBoard:
    """Tests for SlidingPuzzle construction and moves."""

    def test_goal_is_solved(self):
        for side in (2, 3, 4):
            goal = SlidingPuzzle.goal(side)
            assert goal.solved()
            assert goal.weight == 0
            assert goal.is_solvable()

    def test_from_tiles_weight(self):
        board = SlidingPuzzle.from_tiles([1, 0, 2, 3, 4, 5, 6, 7, 8])
        assert board.hole == 1
        assert board.weight == 1
        assert not board.solved()

    def test_from_tiles_rejects_bad_input(self):
        with pytest.raises(ValueError):
            SlidingPuzzle.from_tiles([0, 1, 2])
        with pytest.raises(ValueError):
            SlidingPuzzle.from_tiles([0, 1, 1, 3])

    def test_moves_from_corner_and_center(self):
        """The hole has two moves in a corner and four in the middle."""
        assert len(list(SlidingPuzzle.goal(3).moves())) == 2
        center = SlidingPuzzle.from_tiles([1, 2, 3, 4, 0, 5, 6, 7, 8])
        assert len(list(center.moves())) == 4
        assert all(cost == 1 for _, cost in center.moves())

    def test_switch_keeps_weight_in_sync(self, rng):
        """The incrementally updated weight equals a full recount."""
        board = SlidingPuzzle.scrambled(4, 50, rng)
        for nxt, _ in board.moves():
            assert nxt.weight == SlidingPuzzle.from_tiles(nxt.positions).weight

    def test_solvability_parity(self):
        # swapping two pieces flips the parity
        assert not SlidingPuzzle.from_tiles([0, 2, 1, 3, 4, 5, 6, 7, 8]).is_solvable()
        assert not SlidingPuzzle.from_tiles([0, 2, 1, 3]).is_solvable()
        # even side: moving the hole one row down flips it back
        assert SlidingPuzzle.from_tiles([2, 1, 0, 3]).is_solvable()

    def test_random_boards_are_solvable(self, rng):
        for _ in range(5):
            assert SlidingPuzzle.shuffled(3, rng).is_solvable()
            assert SlidingPuzzle.scrambled(4, 30, rng).is_solvable()

    def test_str(self):
        assert str(SlidingPuzzle.from_tiles([1, 0, 2, 3])) == "1 .\n2 3"


class TestSolving:
    """The puzzle as input to bfs, astar and idastar."""

    def test_one_move_away(self):
        board = SlidingPuzzle.from_tiles([1, 0, 2, 3, 4, 5, 6, 7, 8])
        path, cost = solve_with(astar, board)
        assert cost == 1
        assert path[-1] == SlidingPuzzle.goal(3)

    def test_already_solved(self):
        goal = SlidingPuzzle.goal(3)
        assert solve_with(idastar, goal) == ([goal], 0)

    def test_astar_and_idastar_agree(self):
        """Both find optimal solutions, never shorter than the Manhattan bound."""
        board = SlidingPuzzle.scrambled(3, 24, np.random.default_rng(7))
        a_path, a_cost = solve_with(astar, board)
        i_path, i_cost = solve_with(idastar, board)
        assert a_cost == i_cost
        assert a_cost >= board.weight
        assert a_path[0] == i_path[0] == board
        assert a_path[-1].solved() and i_path[-1].solved()
        assert len(a_path) - 1 == a_cost

    def test_shuffled_board(self):
        """A uniformly shuffled solvable 8-puzzle: equal optimal costs, at least the Manhattan weight."""
        board = SlidingPuzzle.shuffled(3, np.random.default_rng(2024))
        assert board.is_solvable()
        _, a_cost = solve_with(astar, board)
        i_path, i_cost = solve_with(idastar, board)
        assert a_cost == i_cost
        assert i_cost >= board.weight
        assert i_path[-1].solved()
        assert len(i_path) - 1 == i_cost

    def test_bfs_matches_astar_move_count(self):
        board = SlidingPuzzle.scrambled(3, 12, np.random.default_rng(3))
        path = bfs([board], lambda b: [n for n, _ in b.moves()], lambda b: b.solved())
        _, cost = solve_with(astar, board)
        assert len(path) - 1 == cost

    def test_problem_adapter(self):
        board = SlidingPuzzle.from_tiles([1, 2, 0, 3, 4, 5, 6, 7, 8])
        problem = SlidingPuzzleProblem(board)
        assert problem.initial_state() == board
        assert problem.heuristic(board) == 2
        assert set(problem.actions(board)) == {1, 5}
        assert problem.result(board, 1).positions == (1, 0, 2, 3, 4, 5, 6, 7, 8)
