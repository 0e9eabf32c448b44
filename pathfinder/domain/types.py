"""Core type definitions for the grid pathfinding engine."""

import math
from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import Dict, Iterator, List, Literal, Optional, Tuple

# Coordinate type for grid positions: (row, col)
Coord = Tuple[int, int]

# Algorithm identifiers
AlgorithmType = Literal["bfs", "dfs", "dijkstra", "astar", "greedy"]

# Heuristic function identifiers
HeuristicId = Literal["manhattan", "euclidean", "chebyshev"]

# Editing tools
ToolType = Literal["wall", "start", "end", "weight", "eraser"]

# Replay speed presets
SpeedType = Literal["slow", "medium", "fast", "instant"]

# Delay per replayed visited node, in milliseconds
SPEED_VALUES: Dict[str, int] = {
    "slow": 100,
    "medium": 30,
    "fast": 10,
    "instant": 0,
}


class NodeType(str, Enum):
    """Role of a cell on the grid."""
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    END = "end"
    WEIGHT = "weight"
    VISITED = "visited"
    PATH = "path"
    CURRENT = "current"


class Terrain(IntEnum):
    """Cost of entering a cell."""
    NORMAL = 1
    GRASS = 2
    WATER = 5
    MOUNTAIN = 10


# Replay states painted over a finished run
SEARCH_TYPES = (NodeType.VISITED, NodeType.PATH, NodeType.CURRENT)


@dataclass(frozen=True)
class Node:
    """A single grid cell. Changing type or terrain means replacing the node."""
    row: int
    col: int
    type: NodeType = NodeType.EMPTY
    terrain: Terrain = Terrain.NORMAL

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    def is_wall(self) -> bool:
        """Check if this node blocks traversal."""
        return self.type == NodeType.WALL

    def is_endpoint(self) -> bool:
        return self.type in (NodeType.START, NodeType.END)


@dataclass
class SearchState:
    """Per-run bookkeeping for one node, owned by a single search run."""
    distance: float = math.inf   # Accumulated cost (BFS/Dijkstra)
    g_score: float = math.inf    # Cost from start (A*)
    f_score: float = math.inf    # g + h (A*)
    heuristic: float = 0.0       # Estimate to end (A*/Greedy)
    parent: Optional[Coord] = None
    is_visited: bool = False


class Grid:
    """Rectangular, row-major collection of nodes."""

    def __init__(self, rows: int, cols: int, nodes: Optional[List[List[Node]]] = None):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        if nodes is None:
            nodes = [[Node(r, c) for c in range(cols)] for r in range(rows)]
        self._nodes = nodes

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.rows == other.rows and self.cols == other.cols and self._nodes == other._nodes

    def is_valid_coord(self, row: int, col: int) -> bool:
        """Check if coordinate is within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get_node(self, row: int, col: int) -> Optional[Node]:
        """Get node at coordinate, returns None if out of bounds."""
        if not self.is_valid_coord(row, col):
            return None
        return self._nodes[row][col]

    def set_node(self, node: Node) -> None:
        """Store a node at its own coordinate."""
        self._nodes[node.row][node.col] = node

    def update(self, row: int, col: int, **fields) -> Optional[Node]:
        """Replace the node at (row, col) with a copy carrying the given fields."""
        node = self.get_node(row, col)
        if node is None:
            return None
        node = replace(node, **fields)
        self.set_node(node)
        return node

    def iter_nodes(self) -> Iterator[Node]:
        """Iterate over every node in row-major order."""
        for row in self._nodes:
            yield from row

    def row(self, index: int) -> List[Node]:
        return list(self._nodes[index])

    def copy(self) -> "Grid":
        """Shallow structural copy; nodes are immutable so they are shared."""
        return Grid(self.rows, self.cols, [list(row) for row in self._nodes])


@dataclass
class AlgorithmResult:
    """Outcome of one search run."""
    visited_nodes_in_order: List[Node] = field(default_factory=list)
    shortest_path: List[Node] = field(default_factory=list)
    success: bool = False

    @property
    def path_length(self) -> int:
        return len(self.shortest_path)


@dataclass
class RunStats:
    """Statistics derived from one AlgorithmResult."""
    algorithm: str
    nodes_visited: int = 0
    path_length: int = 0
    execution_time_ms: float = 0.0
    path_cost: int = 0


@dataclass
class RunConfig:
    """Configuration for a visualization run."""
    algorithm: AlgorithmType = "astar"
    heuristic: HeuristicId = "manhattan"
    speed: SpeedType = "medium"

    @property
    def delay_ms(self) -> int:
        """Delay between replayed visited nodes."""
        return SPEED_VALUES[self.speed]
