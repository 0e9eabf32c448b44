"""Shared fixtures for the pathfinder test suite."""

from typing import List

import pytest

from pathfinder.domain.types import Grid, Node, NodeType, Terrain

# One character per cell
LEGEND = {
    ".": (NodeType.EMPTY, Terrain.NORMAL),
    "#": (NodeType.WALL, Terrain.NORMAL),
    "S": (NodeType.START, Terrain.NORMAL),
    "E": (NodeType.END, Terrain.NORMAL),
    "g": (NodeType.WEIGHT, Terrain.GRASS),
    "w": (NodeType.WEIGHT, Terrain.WATER),
    "m": (NodeType.WEIGHT, Terrain.MOUNTAIN),
}


def build_grid(layout: List[str]) -> Grid:
    """Build a grid from rows of legend characters."""
    rows = len(layout)
    cols = len(layout[0])
    nodes = []
    for r, line in enumerate(layout):
        assert len(line) == cols, "layout rows must have equal length"
        row = []
        for c, char in enumerate(line):
            node_type, terrain = LEGEND[char]
            row.append(Node(r, c, node_type, terrain))
        nodes.append(row)
    return Grid(rows, cols, nodes)


@pytest.fixture
def grid_from():
    return build_grid
