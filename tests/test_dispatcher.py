"""Tests for algorithm dispatch by name."""

import logging

import pytest

from pathfinder.domain.algorithms import astar, bfs, dfs, dijkstra, greedy
from pathfinder.domain.dispatcher import ALGORITHM_INFO, ALGORITHMS, run_algorithm

LAYOUT = [
    "S..w...",
    ".#.w.#.",
    ".#...#E",
]


class TestRunAlgorithm:

    @pytest.mark.parametrize("name,func", [
        ("bfs", bfs), ("dfs", dfs), ("dijkstra", dijkstra),
    ])
    def test_uninformed_dispatch(self, grid_from, name, func) -> None:
        grid = grid_from(LAYOUT)
        assert run_algorithm(name, grid) == func(grid)

    @pytest.mark.parametrize("name,func", [("astar", astar), ("greedy", greedy)])
    @pytest.mark.parametrize("heuristic", ["manhattan", "euclidean", "chebyshev"])
    def test_heuristic_is_forwarded(self, grid_from, name, func, heuristic) -> None:
        grid = grid_from(LAYOUT)
        assert run_algorithm(name, grid, heuristic) == func(grid, heuristic)

    def test_unknown_algorithm_falls_back_to_bfs(self, grid_from, caplog) -> None:
        grid = grid_from(LAYOUT)
        with caplog.at_level(logging.WARNING, logger="pathfinder.domain.dispatcher"):
            result = run_algorithm("jps", grid)
        assert result == bfs(grid)
        assert "falling back to bfs" in caplog.text

    def test_default_heuristic_is_manhattan(self, grid_from) -> None:
        grid = grid_from(LAYOUT)
        assert run_algorithm("astar", grid) == astar(grid, "manhattan")


class TestAlgorithmInfo:

    def test_every_algorithm_has_info(self) -> None:
        assert set(ALGORITHM_INFO) == set(ALGORITHMS) == {
            "bfs", "dfs", "dijkstra", "astar", "greedy",
        }

    def test_weighted_algorithms(self) -> None:
        weighted = {name for name, info in ALGORITHM_INFO.items() if info.weighted}
        assert weighted == {"dijkstra", "astar"}

    def test_optimal_algorithms(self) -> None:
        optimal = {name for name, info in ALGORITHM_INFO.items() if info.optimal}
        assert optimal == {"bfs", "dijkstra", "astar"}
