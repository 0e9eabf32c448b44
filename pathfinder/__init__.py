"""Pathfinding Visualizer - classical grid search algorithms over editable terrain.

The engine covers a grid model, five interchangeable searches (BFS, DFS,
Dijkstra, A*, Greedy) and a grid state machine that keeps at most one start
and one end while the grid is edited.
"""

from .domain.types import (
    AlgorithmResult, Grid, Node, NodeType, RunConfig, RunStats, SearchState, Terrain,
)
from .domain.algorithms import astar, bfs, dfs, dijkstra, greedy
from .domain.dispatcher import ALGORITHM_INFO, run_algorithm
from .app.grid_store import GridStateMachine

__version__ = "1.0.0"

__all__ = [
    "ALGORITHM_INFO",
    "AlgorithmResult",
    "Grid",
    "GridStateMachine",
    "Node",
    "NodeType",
    "RunConfig",
    "RunStats",
    "SearchState",
    "Terrain",
    "astar",
    "bfs",
    "dfs",
    "dijkstra",
    "greedy",
    "run_algorithm",
]
