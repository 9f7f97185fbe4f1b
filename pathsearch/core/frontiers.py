# pathsearch/core/frontiers.py
# Frontier structures shared by every search: the insertion-ordered ledger of
# discovered nodes and the stable min-heap used by cost-aware searches.
from __future__ import annotations
import heapq
from itertools import count
from typing import Callable, Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

N = TypeVar("N", bound=Hashable)
R = TypeVar("R")


def _identity(record):
    return record


class IndexedFrontierMap(Generic[N, R]):
    """
    Insertion-ordered map from a discovered node to its bookkeeping record.

    Every node gets an integer index (0, 1, 2, ...) in discovery order. Records
    refer to their parent by that index, never by node value, so a path is
    rebuilt by walking indices back to a record whose parent is ``None``.

    - membership and insertion: O(1) amortized (backed by a dict)
    - access by index: O(1) (backed by two parallel lists)
    """
    def __init__(self) -> None:
        self._index: Dict[N, int] = {}
        self._nodes: List[N] = []
        self._records: List[R] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node) -> bool:
        return node in self._index

    def __iter__(self) -> Iterator[N]:
        return iter(self._nodes)

    def items(self) -> Iterator[Tuple[N, R]]:
        return zip(self._nodes, self._records)

    def insert_if_absent(self, node: N, record: R) -> bool:
        """Store ``record`` for ``node`` unless the node is already known."""
        if node in self._index:
            return False
        self._index[node] = len(self._nodes)
        self._nodes.append(node)
        self._records.append(record)
        return True

    def replace(self, node: N, record: R) -> int:
        """Overwrite the record of a known node in place and return its index."""
        i = self._index[node]
        self._records[i] = record
        return i

    def get_by_index(self, i: int) -> Tuple[N, R]:
        if not 0 <= i < len(self._nodes):
            raise IndexError(f"frontier index {i} out of range (size {len(self._nodes)})")
        return self._nodes[i], self._records[i]

    def lookup(self, node) -> Optional[R]:
        i = self._index.get(node)
        return None if i is None else self._records[i]

    def index_of(self, node) -> Optional[int]:
        return self._index.get(node)

    def reconstruct_path(self, index: int, parent_of: Callable[[R], Optional[int]] = _identity) -> List[N]:
        """
        Nodes from a root entry down to the entry at ``index``.

        ``parent_of`` extracts the parent index from a record; the default
        treats the record itself as the parent index (breadth-first records).
        """
        path = []
        i: Optional[int] = index
        while i is not None:
            node, record = self.get_by_index(i)
            path.append(node)
            i = parent_of(record)
        path.reverse()
        return path


class CostQueue:
    """
    Min-heap of ``(f, g, index)`` entries for the cost-aware searches.

    Lower f pops first. Among equal f the larger g (the deeper entry) wins,
    and entries still tied pop in push order. Only costs are compared, never
    the nodes behind the indices.
    """
    def __init__(self) -> None:
        self._heap: List[Tuple] = []
        self._seq = count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, f, g, index: int) -> None:
        heapq.heappush(self._heap, (f, -g, next(self._seq), index))

    def pop(self) -> Tuple[object, object, int]:
        f, neg_g, _, index = heapq.heappop(self._heap)
        return f, -neg_g, index

    def peek(self) -> Tuple[object, object, int]:
        f, neg_g, _, index = self._heap[0]
        return f, -neg_g, index
