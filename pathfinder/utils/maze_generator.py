"""
Wall and terrain generators.

Generators only propose coordinates; the grid state machine applies them
one at a time through its normal edit protocol. No generator ever emits
the start or end coordinate.
"""

import math
from typing import Callable, Dict, List, Optional

from ..domain.types import Coord, Terrain
from .rng import SeededRNG, default_rng

Candidate = Dict[str, int]

TERRAIN_WEIGHTS = [int(Terrain.GRASS), int(Terrain.WATER), int(Terrain.MOUNTAIN)]


def _is_start_or_end(row: int, col: int, start: Coord, end: Coord) -> bool:
    return (row, col) == tuple(start) or (row, col) == tuple(end)


def _is_near_start_or_end(row: int, col: int, start: Coord, end: Coord, buffer: int = 2) -> bool:
    """Check if a cell lies within `buffer` cells (Chebyshev) of either endpoint."""
    near_start = abs(row - start[0]) <= buffer and abs(col - start[1]) <= buffer
    near_end = abs(row - end[0]) <= buffer and abs(col - end[1]) <= buffer
    return near_start or near_end


def recursive_division_maze(rows: int, cols: int, start: Coord, end: Coord,
                            rng: Optional[SeededRNG] = None) -> List[Candidate]:
    """
    Vertical walls with alternating gaps, forming a snake-like route,
    plus a few horizontal connectors for variety.
    """
    if rng is None:
        rng = default_rng

    walls: List[Candidate] = []
    num_walls = cols // 6

    for i in range(1, num_walls + 1):
        wall_col = (i * cols) // (num_walls + 1)

        # Alternate the gap between the top and the middle
        gap_start = 2 if i % 2 == 0 else rows // 2

        for row in range(1, rows - 1):
            if gap_start <= row <= gap_start + 4:
                continue
            if _is_near_start_or_end(row, wall_col, start, end, 2):
                continue
            walls.append({"row": row, "col": wall_col})

    for i in range(3):
        wall_row = ((i + 1) * rows) // 4
        start_col = int(rng.random() * (cols / 3)) + 2
        length = cols // 4

        for col in range(start_col, min(start_col + length, cols - 2)):
            if not _is_near_start_or_end(wall_row, col, start, end, 2):
                walls.append({"row": wall_row, "col": col})

    return walls


def random_maze(rows: int, cols: int, start: Coord, end: Coord, density: float = 0.25,
                rng: Optional[SeededRNG] = None) -> List[Candidate]:
    """
    Scatter walls uniformly at the given density, keeping a 3-cell
    buffer around both endpoints clear.

    Raises:
        ValueError: If density is outside [0, 1]
    """
    if not (0.0 <= density <= 1.0):
        raise ValueError(f"Density must be between 0.0 and 1.0, got {density}")

    if rng is None:
        rng = default_rng

    walls: List[Candidate] = []
    for row in range(rows):
        for col in range(cols):
            if _is_near_start_or_end(row, col, start, end, 3):
                continue
            if rng.random() < density:
                walls.append({"row": row, "col": col})

    return walls


def stair_pattern(rows: int, cols: int, start: Coord, end: Coord,
                  rng: Optional[SeededRNG] = None) -> List[Candidate]:
    """
    Staggered vertical barriers that reward goal-directed search.

    The layout is fixed; ``rng`` is accepted so every entry in
    MAZE_GENERATORS can be called the same way, and is not consumed.
    """
    walls: List[Candidate] = []

    for i in range(4):
        first_row = 3 + i * 5
        col = 5 + i * 8

        for j in range(rows - 6):
            row = first_row + j
            if 0 <= row < rows and 0 <= col < cols:
                if not _is_near_start_or_end(row, col, start, end, 2):
                    walls.append({"row": row, "col": col})

    return walls


def generate_weighted_terrain(rows: int, cols: int, start: Coord, end: Coord,
                              rng: Optional[SeededRNG] = None) -> List[Candidate]:
    """
    Round clusters of grass, water or mountain terrain.
    One cluster per 150 cells, radius 2-5.
    """
    if rng is None:
        rng = default_rng

    weights: List[Candidate] = []
    num_clusters = (rows * cols) // 150

    for _ in range(num_clusters):
        center_row = rng.randint(0, rows - 1)
        center_col = rng.randint(0, cols - 1)
        radius = rng.randint(2, 5)
        weight = rng.choice(TERRAIN_WEIGHTS)

        for row in range(center_row - radius, center_row + radius + 1):
            for col in range(center_col - radius, center_col + radius + 1):
                if not (0 <= row < rows and 0 <= col < cols):
                    continue
                distance = math.sqrt((row - center_row) ** 2 + (col - center_col) ** 2)
                if distance <= radius and not _is_start_or_end(row, col, start, end):
                    weights.append({"row": row, "col": col, "weight": weight})

    return weights


# Wall generators by name
MAZE_GENERATORS: Dict[str, Callable[..., List[Candidate]]] = {
    "recursive": recursive_division_maze,
    "random": random_maze,
    "stair": stair_pattern,
}
