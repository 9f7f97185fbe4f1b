"""Package exposing search algorithm implementations."""

from .bfs import bfs, bfs_loop, bfs_reach, BfsReachable
from .dijkstra import dijkstra, dijkstra_all, dijkstra_partial, dijkstra_reach, DijkstraReachable
from .astar import astar
from .ida_star import idastar

__all__ = [
    "bfs", "bfs_loop", "bfs_reach", "BfsReachable",
    "dijkstra", "dijkstra_all", "dijkstra_partial", "dijkstra_reach", "DijkstraReachable",
    "astar", "idastar",
]
