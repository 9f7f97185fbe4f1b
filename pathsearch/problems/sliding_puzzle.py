# pathsearch/problems/sliding_puzzle.py
# The n x n sliding-tile puzzle (8-puzzle for n = 3, 15-puzzle for n = 4).
from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

from ..core.problem import Problem


@lru_cache(maxsize=None)
def _neighbours(side: int) -> Tuple[Tuple[int, ...], ...]:
    """For every cell, the cells the hole can move to (left, up, right, down)."""
    table = []
    for idx in range(side * side):
        cells = []
        if idx % side > 0:
            cells.append(idx - 1)
        if idx >= side:
            cells.append(idx - side)
        if idx % side < side - 1:
            cells.append(idx + 1)
        if idx < side * side - side:
            cells.append(idx + side)
        table.append(tuple(cells))
    return tuple(table)


def _distance(side: int, idx: int, piece: int) -> int:
    # Manhattan distance between cell idx and the home cell of piece
    return abs(idx % side - piece % side) + abs(idx // side - piece // side)


@dataclass(frozen=True)
class SlidingPuzzle:
    """
    Board state. ``positions[i]`` is the home cell of the piece sitting on
    cell ``i``; piece 0 is the hole and its home is cell 0.

    ``weight`` caches the sum of Manhattan distances of all pieces but the
    hole, an admissible and consistent heuristic for unit-cost moves.
    """
    positions: Tuple[int, ...]
    hole: int
    weight: int
    side: int = 3

    @classmethod
    def goal(cls, side: int = 3) -> "SlidingPuzzle":
        return cls(tuple(range(side * side)), 0, 0, side)

    @classmethod
    def from_tiles(cls, tiles: Sequence[int]) -> "SlidingPuzzle":
        """Build a board from a row-major permutation of 0..n*n-1."""
        tiles = tuple(int(t) for t in tiles)
        side = int(round(len(tiles) ** 0.5))
        if side < 2 or side * side != len(tiles):
            raise ValueError(f"expected a square number (>= 4) of tiles, got {len(tiles)}")
        if sorted(tiles) != list(range(len(tiles))):
            raise ValueError(f"tiles must be a permutation of 0..{len(tiles) - 1}: {tiles}")
        hole = tiles.index(0)
        weight = sum(_distance(side, i, p) for i, p in enumerate(tiles) if i != hole)
        return cls(tiles, hole, weight, side)

    @classmethod
    def shuffled(cls, side: int = 3, rng: Optional[np.random.Generator] = None) -> "SlidingPuzzle":
        """Uniformly random solvable board."""
        rng = rng or np.random.default_rng()
        while True:
            board = cls.from_tiles(rng.permutation(side * side))
            if board.is_solvable():
                return board

    @classmethod
    def scrambled(cls, side: int = 3, moves: int = 20, rng: Optional[np.random.Generator] = None) -> "SlidingPuzzle":
        """Random walk of ``moves`` hole moves from the goal, never undoing the previous move."""
        rng = rng or np.random.default_rng()
        board = cls.goal(side)
        previous = None
        for _ in range(moves):
            options = [c for c in _neighbours(side)[board.hole] if c != previous]
            previous = board.hole
            board = board.switch(options[int(rng.integers(len(options)))])
        return board

    def switch(self, idx: int) -> "SlidingPuzzle":
        """Move the hole to cell ``idx`` (which must be adjacent to it)."""
        p = list(self.positions)
        p[self.hole], p[idx] = p[idx], p[self.hole]
        piece = self.positions[idx]
        weight = self.weight + _distance(self.side, self.hole, piece) - _distance(self.side, idx, piece)
        return SlidingPuzzle(tuple(p), idx, weight, self.side)

    def moves(self) -> Iterator[Tuple["SlidingPuzzle", int]]:
        """Successor boards, each one move away."""
        for idx in _neighbours(self.side)[self.hole]:
            yield self.switch(idx), 1

    def solved(self) -> bool:
        return self.positions == tuple(range(len(self.positions)))

    def is_solvable(self) -> bool:
        inversions = 0
        pieces = [p for p in self.positions if p != 0]
        for i, c in enumerate(pieces):
            for d in pieces[i + 1:]:
                if d < c:
                    inversions ^= 1
        if self.side % 2 == 1:
            return inversions == 0
        return (self.hole // self.side) % 2 == inversions

    def __str__(self) -> str:
        rows = []
        for r in range(self.side):
            cells = self.positions[r * self.side:(r + 1) * self.side]
            rows.append(" ".join("." if c == 0 else str(c) for c in cells))
        return "\n".join(rows)


class SlidingPuzzleProblem(Problem):
    """
    Sliding puzzle as a search problem.

    - State: SlidingPuzzle board
    - ACTIONS(s): cells adjacent to the hole
    - RESULT(s,a): board with the hole moved to cell a
    - c(s,a,s'): 1
    - heuristic(s): Manhattan distance sum (s.weight)
    """
    def __init__(self, start: SlidingPuzzle):
        self.start = start

    def initial_state(self) -> SlidingPuzzle:
        return self.start

    def is_goal(self, state: SlidingPuzzle) -> bool:
        return state.solved()

    def actions(self, state: SlidingPuzzle) -> Iterable[int]:
        return _neighbours(state.side)[state.hole]

    def result(self, state: SlidingPuzzle, action: int) -> SlidingPuzzle:
        return state.switch(action)

    def step_cost(self, state, action, next_state) -> float:
        return 1

    def heuristic(self, state: SlidingPuzzle) -> float:
        return state.weight
