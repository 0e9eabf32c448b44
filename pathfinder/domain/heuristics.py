"""Heuristic functions for informed search (A* and Greedy)."""

import logging
import math
from typing import Callable, Union

from .types import Coord, HeuristicId, Node

logger = logging.getLogger(__name__)

Point = Union[Node, Coord]


def _as_coord(point: Point) -> Coord:
    if isinstance(point, Node):
        return point.coord
    return point


def manhattan_distance(a: Point, b: Point) -> float:
    """
    Manhattan (L1) distance heuristic.
    Admissible for 4-directional movement with unit minimum cost.
    """
    (r1, c1), (r2, c2) = _as_coord(a), _as_coord(b)
    return abs(r1 - r2) + abs(c1 - c2)


def euclidean_distance(a: Point, b: Point) -> float:
    """
    Euclidean (L2) distance heuristic.
    Never exceeds manhattan, so also admissible on this grid.
    """
    (r1, c1), (r2, c2) = _as_coord(a), _as_coord(b)
    dr = r1 - r2
    dc = c1 - c2
    return math.sqrt(dr * dr + dc * dc)


def chebyshev_distance(a: Point, b: Point) -> float:
    """Chebyshev (L-infinity) distance heuristic."""
    (r1, c1), (r2, c2) = _as_coord(a), _as_coord(b)
    return max(abs(r1 - r2), abs(c1 - c2))


# Mapping from heuristic IDs to functions
HEURISTICS: dict[str, Callable[[Point, Point], float]] = {
    "manhattan": manhattan_distance,
    "euclidean": euclidean_distance,
    "chebyshev": chebyshev_distance,
}


def get_heuristic(heuristic_id: HeuristicId) -> Callable[[Point, Point], float]:
    """Get heuristic function by ID, falling back to manhattan."""
    func = HEURISTICS.get(heuristic_id)
    if func is None:
        logger.warning("Unknown heuristic %r, using manhattan", heuristic_id)
        return manhattan_distance
    return func
