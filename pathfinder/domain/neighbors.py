"""Neighbor generation for grid search."""

from typing import List, Tuple

from .types import Grid, Node

# Orthogonal moves in fixed order: up, down, left, right.
# Expansion order (and therefore tie-breaking) in every algorithm depends on it.
DIRECTIONS: List[Tuple[int, int]] = [
    (-1, 0),  # up
    (1, 0),   # down
    (0, -1),  # left
    (0, 1),   # right
]


def neighbors(node: Node, grid: Grid) -> List[Node]:
    """Get the in-bounds, non-wall orthogonal neighbors of a node."""
    result = []

    for d_row, d_col in DIRECTIONS:
        neighbor = grid.get_node(node.row + d_row, node.col + d_col)
        if neighbor is None or neighbor.is_wall():
            continue
        result.append(neighbor)

    return result


def are_adjacent(a: Node, b: Node) -> bool:
    """Check if two nodes are orthogonally adjacent."""
    return abs(a.row - b.row) + abs(a.col - b.col) == 1
