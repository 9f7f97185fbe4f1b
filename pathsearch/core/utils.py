# pathsearch/core/utils.py
# Helpers for working with paths once a search has returned them.
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple


def build_path(target, parents: Dict[Any, Tuple[Any, Any]]) -> List:
    """
    Rebuild the path ending at ``target`` from a ``{node: (parent, cost)}`` map,
    as returned by ``dijkstra_all`` and ``dijkstra_partial``.

    Start nodes have no entry, so the walk stops there. A target without an
    entry yields ``[target]``.
    """
    rev = [target]
    cur = target
    while cur in parents:
        cur = parents[cur][0]
        rev.append(cur)
    rev.reverse()
    return rev


def path_cost(path: Sequence, successors: Callable[[Any], Iterable[Tuple[Any, Any]]]) -> Optional[Any]:
    """Sum of the cheapest edge between consecutive nodes; None if some edge is missing."""
    total = 0
    for s, s2 in zip(path, path[1:]):
        costs = [c for n, c in successors(s) if n == s2]
        if not costs:
            return None  # Edge not found
        total = total + min(costs)
    return total
