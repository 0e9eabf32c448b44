"""Tests for the grid model, neighbors, heuristics, search runs and paths."""

import math

import pytest

from pathfinder.domain.heuristics import (
    chebyshev_distance, euclidean_distance, get_heuristic, manhattan_distance,
)
from pathfinder.domain.neighbors import neighbors
from pathfinder.domain.path import calculate_path_cost, reconstruct_path, validate_path
from pathfinder.domain.priority_queue import PriorityQueue
from pathfinder.domain.search import SearchRun, clone_grid, find_start_and_end
from pathfinder.domain.types import Grid, Node, NodeType, SearchState, Terrain


# =============================================================================
# Grid model
# =============================================================================


class TestGridModel:

    def test_node_defaults(self) -> None:
        node = Node(2, 3)
        assert node.coord == (2, 3)
        assert node.type == NodeType.EMPTY
        assert node.terrain == Terrain.NORMAL
        assert not node.is_wall()

    def test_node_is_immutable(self) -> None:
        node = Node(0, 0)
        with pytest.raises(Exception):
            node.type = NodeType.WALL

    def test_terrain_costs(self) -> None:
        assert [int(t) for t in Terrain] == [1, 2, 5, 10]

    def test_grid_is_row_major(self) -> None:
        grid = Grid(3, 4)
        nodes = list(grid.iter_nodes())
        assert len(nodes) == 12
        assert [n.coord for n in nodes[:5]] == [(0, 0), (0, 1), (0, 2), (0, 3), (1, 0)]

    @pytest.mark.parametrize("rows,cols", [(0, 5), (5, 0), (-1, 3)])
    def test_grid_rejects_bad_dimensions(self, rows, cols) -> None:
        with pytest.raises(ValueError):
            Grid(rows, cols)

    def test_get_node_out_of_bounds(self) -> None:
        grid = Grid(2, 2)
        assert grid.get_node(-1, 0) is None
        assert grid.get_node(0, 2) is None
        assert grid.get_node(1, 1) == Node(1, 1)

    def test_update_replaces_node(self) -> None:
        grid = Grid(2, 2)
        before = grid.get_node(0, 1)
        after = grid.update(0, 1, type=NodeType.WALL)
        assert after.type == NodeType.WALL
        assert before.type == NodeType.EMPTY
        assert grid.get_node(0, 1) is after

    def test_search_state_initial_values(self) -> None:
        state = SearchState()
        assert state.distance == math.inf
        assert state.g_score == math.inf
        assert state.f_score == math.inf
        assert state.heuristic == 0
        assert state.parent is None
        assert state.is_visited is False


# =============================================================================
# Neighbors
# =============================================================================


class TestNeighbors:

    def test_fixed_order_up_down_left_right(self) -> None:
        grid = Grid(3, 3)
        result = neighbors(grid.get_node(1, 1), grid)
        assert [n.coord for n in result] == [(0, 1), (2, 1), (1, 0), (1, 2)]

    def test_corner_stays_in_bounds(self) -> None:
        grid = Grid(3, 3)
        result = neighbors(grid.get_node(0, 0), grid)
        assert [n.coord for n in result] == [(1, 0), (0, 1)]

    def test_walls_are_skipped(self, grid_from) -> None:
        grid = grid_from([
            ".#.",
            "#S.",
            "...",
        ])
        result = neighbors(grid.get_node(1, 1), grid)
        assert [n.coord for n in result] == [(2, 1), (1, 2)]

    def test_weighted_cells_are_neighbors(self, grid_from) -> None:
        grid = grid_from(["Sw"])
        result = neighbors(grid.get_node(0, 0), grid)
        assert [n.terrain for n in result] == [Terrain.WATER]


# =============================================================================
# Heuristics
# =============================================================================


class TestHeuristics:

    def test_manhattan(self) -> None:
        assert manhattan_distance((0, 0), (3, 4)) == 7

    def test_euclidean(self) -> None:
        assert euclidean_distance((0, 0), (3, 4)) == pytest.approx(5.0)

    def test_chebyshev(self) -> None:
        assert chebyshev_distance((0, 0), (3, 4)) == 4

    def test_accepts_nodes(self) -> None:
        assert manhattan_distance(Node(1, 1), Node(4, 5)) == 7

    def test_lookup_by_name(self) -> None:
        assert get_heuristic("euclidean") is euclidean_distance
        assert get_heuristic("chebyshev") is chebyshev_distance

    def test_unknown_name_falls_back_to_manhattan(self) -> None:
        assert get_heuristic("octile") is manhattan_distance


# =============================================================================
# Search runs and cloning
# =============================================================================


class TestSearchRun:

    def test_clone_preserves_content(self, grid_from) -> None:
        grid = grid_from(["S#w", "..E"])
        clone = clone_grid(grid)
        assert clone == grid
        assert clone is not grid

    def test_clone_is_independent(self, grid_from) -> None:
        grid = grid_from(["S.E"])
        clone = clone_grid(grid)
        clone.update(0, 1, type=NodeType.WALL)
        assert grid.get_node(0, 1).type == NodeType.EMPTY

    def test_find_start_and_end(self, grid_from) -> None:
        start, end = find_start_and_end(grid_from(["...", "S.E"]))
        assert start.coord == (1, 0)
        assert end.coord == (1, 2)

    def test_find_missing_endpoints(self) -> None:
        assert find_start_and_end(Grid(2, 2)) == (None, None)

    def test_states_start_fresh_per_run(self, grid_from) -> None:
        grid = grid_from(["S.E"])
        first = SearchRun(grid)
        node = first.grid.get_node(0, 1)
        first.state(node).distance = 3
        first.state(node).is_visited = True

        second = SearchRun(grid)
        assert second.state(node) == SearchState()

    def test_has_endpoints(self, grid_from) -> None:
        assert SearchRun(grid_from(["S.E"])).has_endpoints
        assert not SearchRun(grid_from(["S.."])).has_endpoints


# =============================================================================
# Path utilities
# =============================================================================


class TestPaths:

    def test_reconstruct_follows_parents(self, grid_from) -> None:
        run = SearchRun(grid_from(["S..E"]))
        a, b, c, d = run.grid.row(0)
        run.set_parent(b, a)
        run.set_parent(c, b)
        run.set_parent(d, c)
        assert reconstruct_path(d, run) == [a, b, c, d]

    def test_reconstruct_without_parent_returns_lone_node(self, grid_from) -> None:
        run = SearchRun(grid_from(["S..E"]))
        end = run.end
        assert reconstruct_path(end, run) == [end]

    def test_path_cost_sums_terrain(self, grid_from) -> None:
        grid = grid_from(["Sgwm"])
        assert calculate_path_cost(grid.row(0)) == 1 + 2 + 5 + 10

    def test_empty_path_costs_nothing(self) -> None:
        assert calculate_path_cost([]) == 0

    def test_validate_path(self, grid_from) -> None:
        grid = grid_from(["S.", "#E"])
        assert validate_path([grid.get_node(0, 0), grid.get_node(0, 1), grid.get_node(1, 1)], grid)
        # Diagonal step
        assert not validate_path([grid.get_node(0, 0), grid.get_node(1, 1)], grid)
        # Through a wall
        assert not validate_path([grid.get_node(0, 0), grid.get_node(1, 0), grid.get_node(1, 1)], grid)
        assert not validate_path([], grid)


# =============================================================================
# Priority queue
# =============================================================================


class TestPriorityQueue:

    def test_orders_by_key(self) -> None:
        pq = PriorityQueue(key=lambda item: (item[1],))
        for item in [("a", 3), ("b", 1), ("c", 2)]:
            pq.put(item)
        assert [pq.get()[0] for _ in range(3)] == ["b", "c", "a"]
        assert pq.is_empty()

    def test_equal_keys_are_fifo(self) -> None:
        pq = PriorityQueue(key=lambda item: (0,))
        for name in "abcd":
            pq.put(name)
        assert [pq.get() for _ in range(4)] == list("abcd")

    def test_tuple_key_breaks_ties(self) -> None:
        pq = PriorityQueue(key=lambda item: (item[1], item[2]))
        pq.put(("far", 5, 3))
        pq.put(("near", 5, 1))
        pq.put(("cheap", 4, 9))
        assert [pq.get()[0] for _ in range(3)] == ["cheap", "near", "far"]

    def test_key_is_captured_at_insertion(self) -> None:
        priorities = {"a": 1, "b": 2}
        pq = PriorityQueue(key=lambda item: (priorities[item],))
        pq.put("a")
        pq.put("b")
        priorities["a"] = 10
        pq.put("a")
        # Duplicate entries are kept; the stale one surfaces first
        assert [pq.get() for _ in range(3)] == ["a", "b", "a"]

    def test_get_and_peek_on_empty(self) -> None:
        pq = PriorityQueue(key=lambda item: (item,))
        assert pq.get() is None
        assert pq.peek() is None
        pq.put(4)
        assert pq.peek() == 4
        assert len(pq) == 1
