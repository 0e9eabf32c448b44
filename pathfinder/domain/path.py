"""Path reconstruction and validation utilities."""

from typing import List, Sequence

from .neighbors import are_adjacent
from .search import SearchRun
from .types import AlgorithmResult, Grid, Node, RunStats


def reconstruct_path(end_node: Node, run: SearchRun) -> List[Node]:
    """
    Reconstruct the path from start to end using parent links.
    If end_node was never discovered, the result is just [end_node].
    """
    path = []
    current = end_node

    while current is not None:
        path.append(current)
        current = run.parent_of(current)

    # Reverse to get path from start to end
    path.reverse()
    return path


def calculate_path_cost(path: Sequence[Node]) -> int:
    """Total terrain cost of a path, counting every node on it."""
    return sum(int(node.terrain) for node in path)


def compute_stats(result: AlgorithmResult, algorithm: str, execution_time_ms: float) -> RunStats:
    """Derive run statistics from a result."""
    return RunStats(
        algorithm=algorithm.upper(),
        nodes_visited=len(result.visited_nodes_in_order),
        path_length=len(result.shortest_path),
        execution_time_ms=round(execution_time_ms, 3),
        path_cost=calculate_path_cost(result.shortest_path),
    )


def validate_path(path: Sequence[Node], grid: Grid) -> bool:
    """
    Validate that a path is walkable and connected.
    Returns True if path is valid.
    """
    if not path:
        return False

    for node in path:
        current = grid.get_node(node.row, node.col)
        if current is None or current.is_wall():
            return False

    for i in range(1, len(path)):
        if not are_adjacent(path[i - 1], path[i]):
            return False

    return True
