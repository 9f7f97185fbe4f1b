from __future__ import annotations

from ..algorithms.bfs import bfs_reach
from ..core.problem import Problem


def sanity_check_problem(problem: Problem, max_states: int = 10_000) -> str:
    """Walks states breadth-first and checks every step cost is present and non-negative.

    The search engines assume non-negative costs without checking; run this
    once on a new problem before trusting Dijkstra or A* results on it.
    """
    seen = 0

    def successors(s):
        for a in problem.actions(s):
            s2 = problem.result(s, a)
            cost = problem.step_cost(s, a, s2)
            if cost is None:
                raise ValueError(f"step_cost is None for (s={s!r}, a={a!r}, s'={s2!r})")
            if cost < 0:
                raise ValueError(f"negative step_cost {cost!r} for (s={s!r}, a={a!r}, s'={s2!r})")
            yield s2

    for _ in bfs_reach([problem.initial_state()], successors):
        seen += 1
        if seen >= max_states:
            break
    return f"OK: visited {seen} states; no None or negative costs."
