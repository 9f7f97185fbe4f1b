# pathsearch/algorithms/astar.py
from __future__ import annotations
from operator import attrgetter
from typing import Callable, Hashable, Iterable, List, Optional, Tuple, TypeVar

from .best_first import best_first_search

N = TypeVar("N", bound=Hashable)


def astar(
    start: N,
    successors: Callable[[N], Iterable[Tuple[N, float]]],
    heuristic: Callable[[N], float],
    success: Callable[[N], bool],
) -> Optional[Tuple[List[N], float]]:
    """
    A* search from ``start`` to a node satisfying ``success``.

    The frontier is ordered by f = g + h; among equal f the deeper entry goes
    first. The result is optimal whenever ``heuristic`` is admissible (never
    overestimates the remaining cost). It need not be consistent: a node that
    was already expanded is re-opened if a strictly cheaper path to it turns up
    later.

    Returns:
        (path, total_cost), or None if no goal is reachable.
    """
    parents, reached = best_first_search([start], successors, success, heuristic=heuristic, name="astar")
    if reached is None:
        return None
    _, record = parents.get_by_index(reached)
    return parents.reconstruct_path(reached, parent_of=attrgetter("parent")), record.cost
