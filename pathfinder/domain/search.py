"""Per-run search context: a private grid clone and its bookkeeping map."""

from typing import Dict, Optional, Tuple

from .types import Coord, Grid, Node, NodeType, SearchState


def clone_grid(grid: Grid) -> Grid:
    """
    Copy a grid for a search run.
    Row, col, type and terrain are kept verbatim; search state lives
    outside the nodes, so a clone never carries a previous run's state.
    """
    return grid.copy()


def find_start_and_end(grid: Grid) -> Tuple[Optional[Node], Optional[Node]]:
    """Locate the start and end nodes by linear scan."""
    start = None
    end = None

    for node in grid.iter_nodes():
        if node.type == NodeType.START:
            start = node
        elif node.type == NodeType.END:
            end = node

    return start, end


class SearchRun:
    """
    State owned by a single algorithm invocation.
    Holds a private clone of the grid and a map from coordinate to
    SearchState. States are created lazily with their initial values.
    """

    def __init__(self, grid: Grid):
        self.grid = clone_grid(grid)
        self.states: Dict[Coord, SearchState] = {}
        self.start, self.end = find_start_and_end(self.grid)

    @property
    def has_endpoints(self) -> bool:
        return self.start is not None and self.end is not None

    def state(self, node: Node) -> SearchState:
        """Get (or create) the search state for a node."""
        coord = node.coord
        state = self.states.get(coord)
        if state is None:
            state = SearchState()
            self.states[coord] = state
        return state

    def parent_of(self, node: Node) -> Optional[Node]:
        """Get the predecessor of a node on the discovered path."""
        state = self.states.get(node.coord)
        if state is None or state.parent is None:
            return None
        return self.grid.get_node(*state.parent)

    def set_parent(self, node: Node, parent: Node) -> None:
        self.state(node).parent = parent.coord
