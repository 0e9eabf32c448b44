"""Headless entry point: build a grid, run one search, print the result."""

import argparse
import logging
import sys

from .app.controller import PathfinderController
from .app.grid_store import GridStateMachine
from .domain.dispatcher import ALGORITHM_INFO
from .domain.heuristics import HEURISTICS
from .domain.types import Grid, NodeType, RunConfig
from .utils.logging_config import setup_logging
from .utils.maze_generator import MAZE_GENERATORS, generate_weighted_terrain
from .utils.rng import SeededRNG

CELL_CHARS = {
    NodeType.EMPTY: ".",
    NodeType.WALL: "#",
    NodeType.START: "S",
    NodeType.END: "E",
    NodeType.WEIGHT: "~",
    NodeType.VISITED: "o",
    NodeType.PATH: "*",
    NodeType.CURRENT: "@",
}


def render_grid(grid: Grid) -> str:
    """Render the grid as text, one character per cell."""
    lines = []
    for r in range(grid.rows):
        lines.append("".join(CELL_CHARS[node.type] for node in grid.row(r)))
    return "\n".join(lines)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a grid pathfinding algorithm")
    parser.add_argument("--rows", type=int, default=25, help="Grid rows (default: 25)")
    parser.add_argument("--cols", type=int, default=50, help="Grid columns (default: 50)")
    parser.add_argument("--algorithm", choices=sorted(ALGORITHM_INFO), default="astar",
                        help="Search algorithm (default: astar)")
    parser.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan",
                        help="Heuristic for astar/greedy (default: manhattan)")
    parser.add_argument("--maze", choices=sorted(MAZE_GENERATORS),
                        help="Generate walls before searching")
    parser.add_argument("--terrain", action="store_true",
                        help="Generate weighted terrain clusters")
    parser.add_argument("--seed", type=int, help="Random seed for generators")
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Main entry point for the command line demo."""
    args = parse_args(argv)
    setup_logging(args.log_file, logging.DEBUG if args.verbose else logging.WARNING)

    try:
        store = GridStateMachine(
            args.rows, args.cols,
            RunConfig(algorithm=args.algorithm, heuristic=args.heuristic, speed="instant"),
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    rng = SeededRNG(args.seed)
    if store.has_endpoints:
        if args.maze:
            generator = MAZE_GENERATORS[args.maze]
            store.apply_walls(generator(store.rows, store.cols, store.start_node,
                                        store.end_node, rng=rng))
        if args.terrain:
            store.apply_weights(generate_weighted_terrain(store.rows, store.cols,
                                                          store.start_node, store.end_node,
                                                          rng=rng))

    controller = PathfinderController(store)
    result = controller.visualize()

    print(render_grid(store.grid))
    if result is None:
        print("Start or end is not placed.")
        return 1

    stats = store.stats
    print()
    print(f"Algorithm:     {ALGORITHM_INFO[args.algorithm].full_name}")
    print(f"Path found:    {'yes' if result.success else 'no'}")
    print(f"Nodes visited: {stats.nodes_visited}")
    print(f"Path length:   {stats.path_length}")
    print(f"Path cost:     {stats.path_cost}")
    print(f"Time:          {stats.execution_time_ms:.2f} ms")
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
