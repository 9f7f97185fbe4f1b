# pathsearch/algorithms/best_first.py
# Priority-queue loop shared by Dijkstra and A*. Dijkstra is the special case
# with no heuristic.
from __future__ import annotations
import logging
from typing import Callable, Hashable, Iterable, Optional, Tuple, TypeVar

from ..core.frontiers import CostQueue, IndexedFrontierMap
from ..core.node import CostRecord

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


def seed(
    parents: IndexedFrontierMap,
    frontier: CostQueue,
    starts: Iterable[N],
    heuristic: Optional[Callable[[N], float]] = None,
) -> None:
    """Register every distinct start node at cost 0."""
    for start in starts:
        if parents.insert_if_absent(start, CostRecord(None, 0)):
            h = 0 if heuristic is None else heuristic(start)
            frontier.push(h, 0, len(parents) - 1)


def relax(
    parents: IndexedFrontierMap,
    frontier: CostQueue,
    index: int,
    cost,
    successors: Iterable[Tuple[N, float]],
    heuristic: Optional[Callable[[N], float]] = None,
) -> None:
    """
    Offer every successor of the entry at ``index`` (reached at ``cost``).

    A successor is queued when it is new or strictly cheaper than its best
    known cost; an existing record is replaced in place, keeping its index.
    Under non-negative weights a finalized node never gets cheaper, so only A*
    with an inconsistent heuristic ever re-opens one.
    """
    for successor, move_cost in successors:
        new_cost = cost + move_cost
        known = parents.lookup(successor)
        if known is None:
            parents.insert_if_absent(successor, CostRecord(index, new_cost))
            n = len(parents) - 1
        elif new_cost < known.cost:
            n = parents.replace(successor, CostRecord(index, new_cost))
        else:
            continue
        h = 0 if heuristic is None else heuristic(successor)
        frontier.push(new_cost + h, new_cost, n)


def best_first_search(
    starts: Iterable[N],
    successors: Callable[[N], Iterable[Tuple[N, float]]],
    stop: Callable[[N], bool],
    heuristic: Optional[Callable[[N], float]] = None,
    name: str = "BestFirst",
) -> Tuple[IndexedFrontierMap, Optional[int]]:
    """
    Pop nodes by f = g + h until ``stop`` holds for a popped node.

    Returns the ledger and the index of the stopping node (None when the queue
    ran dry). Stale queue entries, whose cost exceeds the node's current best
    cost, are skipped.
    """
    parents: IndexedFrontierMap = IndexedFrontierMap()
    frontier = CostQueue()
    seed(parents, frontier, starts, heuristic)
    logger.debug("%s: %d start node(s)", name, len(parents))

    expanded = 0
    while frontier:
        _, cost, index = frontier.pop()
        node, record = parents.get_by_index(index)
        if cost > record.cost:
            continue
        if stop(node):
            logger.debug("%s: stopped at cost %s after %d expansions", name, cost, expanded)
            return parents, index
        expanded += 1
        relax(parents, frontier, index, cost, successors(node), heuristic)

    logger.debug("%s: queue exhausted after %d expansions", name, expanded)
    return parents, None
