# pathsearch/algorithms/bfs.py
# Breadth-first search over an implicit graph. The IndexedFrontierMap doubles as
# the FIFO queue: entries are expanded in index order through a cursor, and each
# entry's record is the index of the entry that discovered it.
from __future__ import annotations
import logging
from typing import Callable, Hashable, Iterable, List, Optional, TypeVar

from ..core.frontiers import IndexedFrontierMap

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


def _bfs_core(
    starts: Iterable[N],
    successors: Callable[[N], Iterable[N]],
    success: Callable[[N], bool],
    check_first: bool,
) -> Optional[List[N]]:
    parents: IndexedFrontierMap[N, Optional[int]] = IndexedFrontierMap()
    for start in starts:
        if check_first and success(start):
            return [start]
        parents.insert_if_absent(start, None)
    logger.debug("bfs: %d start node(s)", len(parents))

    i = 0
    while i < len(parents):
        node, _ = parents.get_by_index(i)
        for successor in successors(node):
            # goal nodes are returned, never stored
            if success(successor):
                path = parents.reconstruct_path(i)
                path.append(successor)
                logger.debug("bfs: found path of %d edges after %d expansions", len(path) - 1, i + 1)
                return path
            parents.insert_if_absent(successor, i)
        i += 1

    logger.debug("bfs: exhausted %d nodes without reaching a goal", len(parents))
    return None


def bfs(
    starts: Iterable[N],
    successors: Callable[[N], Iterable[N]],
    success: Callable[[N], bool],
    check_first: bool = True,
) -> Optional[List[N]]:
    """
    Shortest path (fewest edges) from any node of ``starts`` to a node
    satisfying ``success``.

    Args:
        starts: start nodes; an empty iterable simply finds nothing.
        successors: node -> iterable of neighbouring nodes.
        success: goal test, so the goal may be dynamic rather than a fixed node.
        check_first: test start nodes themselves before expanding anything.

    Returns:
        The path including both ends, or None if no goal is reachable.
        A node never appears twice in the path.
    """
    return _bfs_core(starts, successors, success, check_first)


def bfs_loop(start: N, successors: Callable[[N], Iterable[N]]) -> Optional[List[N]]:
    """
    One of the shortest loops from ``start`` back to ``start``, or None.
    Only ``start`` is repeated (first and last element).
    """
    return _bfs_core([start], successors, lambda n: n == start, check_first=False)


class BfsReachable:
    """
    Iterator over every node reachable from the start set, in BFS order.

    One node is expanded per ``next()`` call. The iterator is single-pass; call
    ``bfs_reach`` again to restart. It never ends on an infinite graph.
    """
    def __init__(self, starts: Iterable[N], successors: Callable[[N], Iterable[N]]) -> None:
        self._successors = successors
        self._seen: IndexedFrontierMap[N, Optional[int]] = IndexedFrontierMap()
        for start in starts:
            self._seen.insert_if_absent(start, None)
        self._cursor = 0

    def remaining_nodes_low_bound(self) -> int:
        """Nodes already discovered but not yet returned. More may turn up."""
        return len(self._seen) - self._cursor

    def __iter__(self) -> "BfsReachable":
        return self

    def __next__(self) -> N:
        if self._cursor >= len(self._seen):
            raise StopIteration
        node, _ = self._seen.get_by_index(self._cursor)
        for successor in self._successors(node):
            self._seen.insert_if_absent(successor, self._cursor)
        self._cursor += 1
        return node


def bfs_reach(starts: Iterable[N], successors: Callable[[N], Iterable[N]]) -> BfsReachable:
    """Visit all nodes reachable from ``starts`` in BFS order, following the order of ``successors``."""
    return BfsReachable(starts, successors)
