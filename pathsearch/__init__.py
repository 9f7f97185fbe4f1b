"""Shortest paths, loops and reachability over implicitly defined graphs - public API."""
from .algorithms.bfs import bfs, bfs_loop, bfs_reach, BfsReachable
from .algorithms.dijkstra import (
    dijkstra, dijkstra_all, dijkstra_partial, dijkstra_reach, DijkstraReachable
)
from .algorithms.astar import astar
from .algorithms.ida_star import idastar
from .core.frontiers import IndexedFrontierMap
from .core.node import CostRecord, DijkstraReachableItem
from .core.utils import build_path, path_cost

__version__ = "0.1.0"

__all__ = [
    'bfs', 'bfs_loop', 'bfs_reach', 'BfsReachable',
    'dijkstra', 'dijkstra_all', 'dijkstra_partial', 'dijkstra_reach', 'DijkstraReachable',
    'astar', 'idastar',
    'IndexedFrontierMap', 'CostRecord', 'DijkstraReachableItem',
    'build_path', 'path_cost',
]
