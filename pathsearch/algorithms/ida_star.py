# pathsearch/algorithms/ida_star.py
# This code implements the IDA* search algorithm, the iterative deepening version of A* that uses a depth-first search strategy.
# Only the current path is kept in memory, at the price of re-expanding nodes on every iteration.
from __future__ import annotations
import logging
from typing import Callable, Hashable, Iterable, Iterator, List, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


def idastar(
    start: N,
    successors: Callable[[N], Iterable[Tuple[N, float]]],
    heuristic: Callable[[N], float],
    success: Callable[[N], bool],
) -> Optional[Tuple[List[N], float]]:
    """
    IDA*: Iterative Deepening A* (tree-like), with an explicit stack so deep solutions do not hit the recursion limit.
    - Bounded by f = g + h, starting at h(start); increases the bound to the smallest f that exceeded the previous bound.
    - Nodes already on the current path are skipped, so a path never repeats a node.
    - With an admissible heuristic the reported cost equals the one astar reports.

    Returns (path, total_cost), or None once no node was pruned by the bound.
    """
    path = [start]
    on_path = {start}

    def expand(node) -> Iterator[Tuple[object, N, object, object]]:
        # children off the current path, cheapest estimated total first
        children = []
        for child, move_cost in successors(node):
            if child in on_path:
                continue
            child_h = heuristic(child)
            children.append((move_cost + child_h, child, move_cost, child_h))
        children.sort(key=lambda c: c[0])
        return iter(children)

    def search(bound) -> Tuple[Optional[object], Optional[object]]:
        """(goal_cost, None) on success, else (None, smallest pruned f or None)."""
        if success(start):
            return 0, None
        min_excess = None
        # one frame per node on ``path``: its cost so far and its unexplored children
        stack = [(0, expand(start))]
        while stack:
            cost, children = stack[-1]
            step = next(children, None)
            if step is None:
                stack.pop()
                if stack:
                    on_path.discard(path.pop())
                continue
            _, child, move_cost, child_h = step
            child_cost = cost + move_cost
            f = child_cost + child_h
            if f > bound:
                if min_excess is None or f < min_excess:
                    min_excess = f
                continue
            path.append(child)
            on_path.add(child)
            if success(child):
                return child_cost, None
            stack.append((child_cost, expand(child)))
        return None, min_excess

    bound = heuristic(start)
    iters = 0
    while True:
        iters += 1
        found, next_bound = search(bound)
        if found is not None:
            logger.debug("idastar: solved with cost %s after %d iteration(s)", found, iters)
            return list(path), found
        if next_bound is None:
            logger.debug("idastar: no goal reachable after %d iteration(s)", iters)
            return None
        logger.debug("idastar: raising bound from %s to %s", bound, next_bound)
        bound = next_bound
