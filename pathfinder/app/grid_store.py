"""Authoritative grid state and the edit protocol that keeps it consistent."""

import logging
from typing import Iterable, Mapping, Optional, get_args

from ..domain.dispatcher import ALGORITHM_INFO
from ..domain.heuristics import HEURISTICS
from ..domain.types import (
    SEARCH_TYPES, SPEED_VALUES, Coord, Grid, Node, NodeType, RunConfig, RunStats,
    Terrain, ToolType,
)
from .fsm import RunStateMachine

logger = logging.getLogger(__name__)

DEFAULT_ROWS = 25
DEFAULT_COLS = 50

TOOLS = get_args(ToolType)

# Fields update_node may overwrite
_NODE_FIELDS = {"type", "terrain"}


def terrain_for_weight(weight: int) -> Terrain:
    """Map a generator weight onto a terrain type."""
    if weight == Terrain.GRASS:
        return Terrain.GRASS
    if weight == Terrain.WATER:
        return Terrain.WATER
    return Terrain.MOUNTAIN


class GridStateMachine:
    """
    Owns the grid, the start/end coordinates, the current tool, the run
    configuration, the run status and the last-run statistics.

    After every edit the grid holds at most one start and one end, and
    they are never on the same cell.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
                 config: Optional[RunConfig] = None):
        self.config = config or RunConfig()
        self.run_status = RunStateMachine()
        self.current_tool: ToolType = "wall"
        self.stats: Optional[RunStats] = None

        self._grid: Grid
        self._start: Optional[Coord] = None
        self._end: Optional[Coord] = None

        self.initialize(rows, cols)

    # Properties

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def start_node(self) -> Optional[Coord]:
        return self._start

    @property
    def end_node(self) -> Optional[Coord]:
        return self._end

    @property
    def has_endpoints(self) -> bool:
        return self._start is not None and self._end is not None

    @property
    def is_running(self) -> bool:
        return self.run_status.is_running()

    @property
    def is_paused(self) -> bool:
        return self.run_status.is_paused()

    @property
    def is_finished(self) -> bool:
        return self.run_status.is_finished()

    # Grid lifecycle

    def initialize(self, rows: int, cols: int) -> None:
        """
        Build a fresh empty grid with the default start and end.
        Start goes to (rows // 2, cols // 4), end to (rows // 2, 3 * cols // 4).
        """
        self._grid = Grid(rows, cols)
        self._start = None
        self._end = None

        self.set_node_type(rows // 2, cols // 4, NodeType.START)
        self.set_node_type(rows // 2, (3 * cols) // 4, NodeType.END)

        self.stats = None
        self.run_status.reset()
        logger.info("Initialized %dx%d grid, start=%s end=%s",
                    rows, cols, self._start, self._end)

    def reset_grid(self) -> None:
        """Re-initialize with the current dimensions."""
        self.initialize(self.rows, self.cols)

    def get_node(self, row: int, col: int) -> Optional[Node]:
        """Get node at position, or None if out of bounds."""
        return self._grid.get_node(row, col)

    # Edit protocol

    def set_node_type(self, row: int, col: int, node_type: NodeType,
                      terrain: Terrain = Terrain.NORMAL) -> None:
        """
        Set the type and terrain of one cell.

        Out-of-bounds targets are ignored. Start and end cells can only be
        overwritten by another start or end. Placing a start clears the
        previous start, and placing it on the end removes the end (and
        the reverse for end).
        """
        current = self._grid.get_node(row, col)
        if current is None:
            logger.debug("Ignoring edit outside grid at (%d, %d)", row, col)
            return

        node_type = NodeType(node_type)
        if current.is_endpoint() and node_type not in (NodeType.START, NodeType.END):
            logger.debug("Refusing to overwrite %s at (%d, %d) with %s",
                         current.type.value, row, col, node_type.value)
            return

        coord = (row, col)
        self._grid.update(row, col, type=node_type, terrain=Terrain(terrain))

        if node_type == NodeType.START:
            self._clear_endpoint(self._start, NodeType.START, coord)
            if self._end == coord:
                self._end = None
            self._start = coord
        elif node_type == NodeType.END:
            self._clear_endpoint(self._end, NodeType.END, coord)
            if self._start == coord:
                self._start = None
            self._end = coord
        else:
            # Direct writes may have stomped a tracked endpoint
            if self._start == coord:
                self._start = None
            if self._end == coord:
                self._end = None

    def _clear_endpoint(self, previous: Optional[Coord], node_type: NodeType, target: Coord):
        if previous is None or previous == target:
            return
        node = self._grid.get_node(*previous)
        if node is not None and node.type == node_type:
            self._grid.update(*previous, type=NodeType.EMPTY)

    def set_start_node(self, row: int, col: int) -> None:
        self.set_node_type(row, col, NodeType.START)

    def set_end_node(self, row: int, col: int) -> None:
        self.set_node_type(row, col, NodeType.END)

    def update_node(self, row: int, col: int, /, **fields) -> None:
        """
        Overwrite fields of one cell during replay.
        Bypasses endpoint protection; callers must skip start and end.
        """
        unknown = set(fields) - _NODE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update node fields: {sorted(unknown)}")

        if "type" in fields:
            fields["type"] = NodeType(fields["type"])
        if "terrain" in fields:
            fields["terrain"] = Terrain(fields["terrain"])
        self._grid.update(row, col, **fields)

    def clear_path(self) -> None:
        """
        Remove visited/path/current markings and the last run's result.
        Walls, weights and endpoints are untouched. Every visited, path or
        current cell becomes empty; its terrain is kept as it was.
        """
        for node in list(self._grid.iter_nodes()):
            if node.type in SEARCH_TYPES:
                self._grid.update(node.row, node.col, type=NodeType.EMPTY)

        self.stats = None
        if self.run_status.is_finished() or self.run_status.is_paused():
            self.run_status.reset_to_idle()

    def clear_walls(self) -> None:
        """Turn every wall and weight back into a normal empty cell."""
        for node in list(self._grid.iter_nodes()):
            if node.type in (NodeType.WALL, NodeType.WEIGHT):
                self._grid.update(node.row, node.col, type=NodeType.EMPTY,
                                  terrain=Terrain.NORMAL)
            elif node.terrain != Terrain.NORMAL:
                self._grid.update(node.row, node.col, terrain=Terrain.NORMAL)

    # Tools and generators

    def apply_tool(self, row: int, col: int, tool: Optional[ToolType] = None) -> None:
        """Apply an editing tool (the current one by default) to a cell."""
        if self.run_status.is_busy():
            logger.debug("Grid is locked while a run is in progress")
            return

        tool = tool or self.current_tool
        if tool == "wall":
            self.set_node_type(row, col, NodeType.WALL)
        elif tool == "start":
            self.set_node_type(row, col, NodeType.START)
        elif tool == "end":
            self.set_node_type(row, col, NodeType.END)
        elif tool == "weight":
            self.set_node_type(row, col, NodeType.WEIGHT, Terrain.WATER)
        elif tool == "eraser":
            self.set_node_type(row, col, NodeType.EMPTY, Terrain.NORMAL)
        else:
            raise ValueError(f"Unknown tool: {tool}")

    def apply_walls(self, walls: Iterable[Mapping[str, int]]) -> None:
        """Place generator-produced walls, one set_node_type call each."""
        count = 0
        for wall in walls:
            self.set_node_type(wall["row"], wall["col"], NodeType.WALL)
            count += 1
        logger.debug("Applied %d wall candidates", count)

    def apply_weights(self, weights: Iterable[Mapping[str, int]]) -> None:
        """Place generator-produced weighted terrain."""
        count = 0
        for entry in weights:
            terrain = terrain_for_weight(entry.get("weight", Terrain.MOUNTAIN))
            self.set_node_type(entry["row"], entry["col"], NodeType.WEIGHT, terrain)
            count += 1
        logger.debug("Applied %d weight candidates", count)

    # Configuration

    def set_current_tool(self, tool: ToolType) -> None:
        if tool not in TOOLS:
            raise ValueError(f"Unknown tool: {tool}")
        self.current_tool = tool

    def set_selected_algorithm(self, algorithm: str) -> None:
        if algorithm not in ALGORITHM_INFO:
            raise ValueError(f"Unknown algorithm: {algorithm}")
        self.config.algorithm = algorithm

    def set_heuristic(self, heuristic: str) -> None:
        if heuristic not in HEURISTICS:
            raise ValueError(f"Unknown heuristic: {heuristic}")
        self.config.heuristic = heuristic

    def set_speed(self, speed: str) -> None:
        if speed not in SPEED_VALUES:
            raise ValueError(f"Unknown speed: {speed}")
        self.config.speed = speed

    def update_config(self, **kwargs) -> None:
        """Update run configuration through the validating setters."""
        setters = {
            "algorithm": self.set_selected_algorithm,
            "heuristic": self.set_heuristic,
            "speed": self.set_speed,
        }
        for key, value in kwargs.items():
            if key in setters:
                setters[key](value)
            else:
                logger.debug("Ignoring unknown config field %s", key)
