# Defines the standard interface for a ready-made search problem and the adapters
# that turn one into the plain callables the search engines consume.
# pathsearch/core/problem.py
from __future__ import annotations
from typing import Callable, Hashable, Iterable, Iterator, Protocol, Tuple, TypeVar

Action = Hashable
State = Hashable

N = TypeVar("N", bound=Hashable)

# Engine-facing callables
Successors = Callable[[N], Iterable[N]]
WeightedSuccessors = Callable[[N], Iterable[Tuple[N, float]]]
Heuristic = Callable[[N], float]
Predicate = Callable[[N], bool]


class Problem(Protocol):
    """Canonical AI search problem interface (atomic state-space view)."""
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def actions(self, s: State) -> Iterable[Action]: ...
    def result(self, s: State, a: Action) -> State: ...
    def step_cost(self, s: State, a: Action, s2: State) -> float: ...
    # Optional heuristic for informed search; default 0
    def heuristic(self, s: State) -> float: return 0.0


def weighted_successors(problem: Problem) -> WeightedSuccessors:
    """(next_state, step_cost) pairs for every action applicable in a state."""
    def successors(s: State) -> Iterator[Tuple[State, float]]:
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            yield s2, problem.step_cost(s, a, s2)
    return successors


def unit_successors(problem: Problem) -> Successors:
    """Next states only, for breadth-first search."""
    def successors(s: State) -> Iterator[State]:
        for a in problem.actions(s):
            yield problem.result(s, a)
    return successors


def heuristic_of(problem: Problem) -> Heuristic:
    h = getattr(problem, "heuristic", None)
    if h is None:
        return lambda s: 0
    return h
