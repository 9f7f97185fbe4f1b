# pathsearch/problems/grid.py
from __future__ import annotations
from typing import FrozenSet, Iterable, Tuple

from ..core.problem import Problem

Coord = Tuple[int, int]

_MOVES = {
    "Up": (-1, 0),
    "Down": (1, 0),
    "Left": (0, -1),
    "Right": (0, 1),
}

class GridProblem(Problem):
    """
    4-neighbor grid pathfinding with unit costs.

    - State: (row, col) tuple
    - ACTIONS(s): subset of {'Up','Down','Left','Right'} that keep you in-bounds and off walls
    - RESULT(s,a): next (row, col)
    - IS-GOAL(s): s == goal
    - c(s,a,s'): 1
    - heuristic(s): Manhattan distance (admissible on 4-neighbor grid)
    """
    def __init__(self, rows: int, cols: int, start: Coord, goal: Coord, walls: Iterable[Coord] = ()):
        self.rows = rows
        self.cols = cols
        self.start = start
        self.goal = goal
        self.walls: FrozenSet[Coord] = frozenset(walls)
        for name, cell in (("start", start), ("goal", goal)):
            if not self.passable(cell):
                raise ValueError(f"{name} {cell} is outside the grid or on a wall")

    @classmethod
    def parse(cls, text: str) -> "GridProblem":
        """
        Build a grid from an ASCII map: '#' wall, 'S' start, 'G' goal, anything else free.
        """
        lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
        start = goal = None
        walls = set()
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                if ch == "#":
                    walls.add((r, c))
                elif ch == "S":
                    start = (r, c)
                elif ch == "G":
                    goal = (r, c)
        if start is None or goal is None:
            raise ValueError("grid map needs exactly one 'S' and one 'G'")
        return cls(len(lines), max(len(line) for line in lines), start, goal, walls)

    def passable(self, cell: Coord) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols and cell not in self.walls

    def initial_state(self) -> Coord:
        return self.start

    def is_goal(self, state: Coord) -> bool:
        return state == self.goal

    def actions(self, state: Coord) -> Iterable[str]:
        r, c = state
        for name, (dr, dc) in _MOVES.items():
            if self.passable((r + dr, c + dc)):
                yield name

    def result(self, state: Coord, action: str) -> Coord:
        r, c = state
        dr, dc = _MOVES[action]
        return (r + dr, c + dc)

    def step_cost(self, state: Coord, action: str, next_state: Coord) -> float:
        return 1

    def heuristic(self, state: Coord) -> float:
        r, c = state
        gr, gc = self.goal
        return abs(r - gr) + abs(c - gc)

def make_grid_problem() -> GridProblem:
    # Example: 5x7 grid, a few walls
    return GridProblem.parse("""
        S......
        ...#...
        ...#...
        ...##..
        ......G
    """)
