# This code implements Dijkstra's algorithm (uniform-cost search) by reusing the generic best-first loop.
# pathsearch/algorithms/dijkstra.py
from __future__ import annotations
from operator import attrgetter
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar

from ..core.frontiers import CostQueue, IndexedFrontierMap
from ..core.node import CostRecord, DijkstraReachableItem
from ..core.utils import build_path
from .best_first import best_first_search, relax, seed

N = TypeVar("N", bound=Hashable)
WeightedSuccessors = Callable[[N], Iterable[Tuple[N, float]]]

_parent = attrgetter("parent")

__all__ = [
    "dijkstra", "dijkstra_all", "dijkstra_partial", "dijkstra_reach",
    "DijkstraReachable", "build_path",
]


def dijkstra(
    starts: Iterable[N],
    successors: WeightedSuccessors,
    success: Callable[[N], bool],
) -> Optional[Tuple[List[N], float]]:
    """
    Cheapest path from the start set to a node satisfying ``success``.

    Edge costs must be non-negative; this is not checked.

    Returns:
        (path, total_cost), or None if no goal is reachable.
    """
    parents, reached = best_first_search(starts, successors, success, name="dijkstra")
    if reached is None:
        return None
    _, record = parents.get_by_index(reached)
    return parents.reconstruct_path(reached, parent_of=_parent), record.cost


def _parents_map(parents: IndexedFrontierMap) -> Dict[N, Tuple[N, float]]:
    out = {}
    for node, record in parents.items():
        if record.parent is None:
            continue  # start node
        parent, _ = parents.get_by_index(record.parent)
        out[node] = (parent, record.cost)
    return out


def dijkstra_partial(
    starts: Iterable[N],
    successors: WeightedSuccessors,
    stop: Callable[[N], bool],
) -> Tuple[Dict[N, Tuple[N, float]], Optional[N]]:
    """
    Explore from the start set until ``stop`` holds for a finalized node.

    Returns ``({node: (parent, cost)}, stopping_node)``. Start nodes are not
    in the map. When the search stopped early, entries of nodes that were
    discovered but not finalized yet may carry non-minimal costs.
    """
    parents, reached = best_first_search(starts, successors, stop, name="dijkstra_partial")
    reached_node = None if reached is None else parents.get_by_index(reached)[0]
    return _parents_map(parents), reached_node


def dijkstra_all(starts: Iterable[N], successors: WeightedSuccessors) -> Dict[N, Tuple[N, float]]:
    """Every node reachable from the start set, mapped to its (parent, minimum cost)."""
    return dijkstra_partial(starts, successors, lambda _: False)[0]


class DijkstraReachable:
    """
    Iterator of ``DijkstraReachableItem`` in non-decreasing total cost.

    A node is produced exactly once, on the pull where it is finalized, and its
    successors are generated during that same pull. Single-pass.
    """
    def __init__(self, starts: Iterable[N], successors: WeightedSuccessors) -> None:
        self._successors = successors
        self._parents: IndexedFrontierMap[N, CostRecord] = IndexedFrontierMap()
        self._frontier = CostQueue()
        seed(self._parents, self._frontier, starts)

    def __iter__(self) -> "DijkstraReachable":
        return self

    def __next__(self) -> DijkstraReachableItem:
        while self._frontier:
            _, cost, index = self._frontier.peek()
            node, record = self._parents.get_by_index(index)
            if cost > record.cost:
                self._frontier.pop()
                continue
            # the entry stays queued until its successors are in hand, so a
            # failing pull can be retried
            successors = list(self._successors(node))
            self._frontier.pop()
            relax(self._parents, self._frontier, index, cost, successors)
            parent = None if record.parent is None else self._parents.get_by_index(record.parent)[0]
            return DijkstraReachableItem(node=node, parent=parent, total_cost=cost)
        raise StopIteration


def dijkstra_reach(starts: Iterable[N], successors: WeightedSuccessors) -> DijkstraReachable:
    """Visit all nodes reachable from ``starts`` in order of increasing cost."""
    return DijkstraReachable(starts, successors)
