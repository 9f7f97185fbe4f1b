# pathsearch/core/node.py
# Records attached to nodes by the cost-aware searches.
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Generic, NamedTuple, Optional, TypeVar

N = TypeVar("N")
C = TypeVar("C")


class CostRecord(NamedTuple):
    """Ledger entry of a cost-aware search: parent index (None for a start) and best known cost."""
    parent: Optional[int]
    cost: Any


@dataclass(frozen=True)
class DijkstraReachableItem(Generic[N, C]):
    """
    One node produced by ``dijkstra_reach``.

    - node: the finalized node
    - parent: the node it was reached from, None for start nodes
    - total_cost: minimum cost from the start set
    """
    node: N
    parent: Optional[N]
    total_cost: C
