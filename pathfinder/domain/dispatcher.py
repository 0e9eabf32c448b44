"""Algorithm selection by name."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict

from .algorithms import astar, bfs, dfs, dijkstra, greedy
from .types import AlgorithmResult, AlgorithmType, Grid, HeuristicId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlgorithmInfo:
    """Display metadata for an algorithm."""
    name: str
    full_name: str
    description: str
    time_complexity: str
    space_complexity: str
    weighted: bool
    optimal: bool


ALGORITHM_INFO: Dict[str, AlgorithmInfo] = {
    "bfs": AlgorithmInfo(
        name="BFS",
        full_name="Breadth-First Search",
        description="Explores all neighbors at current depth before moving deeper. "
                    "Guarantees shortest path in unweighted graphs.",
        time_complexity="O(V + E)",
        space_complexity="O(V)",
        weighted=False,
        optimal=True,
    ),
    "dfs": AlgorithmInfo(
        name="DFS",
        full_name="Depth-First Search",
        description="Explores as far as possible along each branch before backtracking. "
                    "Does not guarantee shortest path.",
        time_complexity="O(V + E)",
        space_complexity="O(V)",
        weighted=False,
        optimal=False,
    ),
    "dijkstra": AlgorithmInfo(
        name="Dijkstra",
        full_name="Dijkstra's Algorithm",
        description="Finds shortest path in weighted graphs. "
                    "Explores nodes in order of their distance from start.",
        time_complexity="O((V + E) log V)",
        space_complexity="O(V)",
        weighted=True,
        optimal=True,
    ),
    "astar": AlgorithmInfo(
        name="A*",
        full_name="A* Search Algorithm",
        description="Uses heuristics to guide search towards the goal. "
                    "Faster than Dijkstra while remaining optimal.",
        time_complexity="O(E)",
        space_complexity="O(V)",
        weighted=True,
        optimal=True,
    ),
    "greedy": AlgorithmInfo(
        name="Greedy",
        full_name="Greedy Best-First Search",
        description="Always expands the node closest to the goal. "
                    "Very fast but does not guarantee shortest path.",
        time_complexity="O(E)",
        space_complexity="O(V)",
        weighted=False,
        optimal=False,
    ),
}


# Mapping from algorithm IDs to (grid, heuristic) callables
ALGORITHMS: Dict[str, Callable[[Grid, HeuristicId], AlgorithmResult]] = {
    "bfs": lambda grid, heuristic: bfs(grid),
    "dfs": lambda grid, heuristic: dfs(grid),
    "dijkstra": lambda grid, heuristic: dijkstra(grid),
    "astar": astar,
    "greedy": greedy,
}


def run_algorithm(algorithm: AlgorithmType, grid: Grid,
                  heuristic: HeuristicId = "manhattan") -> AlgorithmResult:
    """
    Run an algorithm by name. Unknown names fall back to BFS.

    Args:
        algorithm: One of bfs, dfs, dijkstra, astar, greedy
        grid: Grid to search (not modified)
        heuristic: Heuristic name, used by astar and greedy only

    Returns:
        AlgorithmResult referencing nodes of the run's private clone
    """
    func = ALGORITHMS.get(algorithm)
    if func is None:
        logger.warning("Unknown algorithm %r, falling back to bfs", algorithm)
        func = ALGORITHMS["bfs"]

    logger.info("Running %s (heuristic=%s) on %dx%d grid",
                algorithm, heuristic, grid.rows, grid.cols)
    return func(grid, heuristic)
