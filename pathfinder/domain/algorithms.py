"""
Graph search algorithms over the grid.

Every algorithm clones the grid into a SearchRun, runs to completion and
returns an AlgorithmResult. A missing endpoint or an unreachable end is an
ordinary unsuccessful result; nothing here raises.
"""

import logging
from collections import deque
from typing import List

from .heuristics import get_heuristic
from .neighbors import neighbors
from .path import reconstruct_path
from .priority_queue import PriorityQueue
from .search import SearchRun
from .types import AlgorithmResult, Grid, HeuristicId, Node, NodeType

logger = logging.getLogger(__name__)


def _found(run: SearchRun, end_node: Node, visited: List[Node]) -> AlgorithmResult:
    path = reconstruct_path(end_node, run)
    logger.debug("Reached end %s after %d expansions, path length %d",
                 end_node.coord, len(visited), len(path))
    return AlgorithmResult(visited_nodes_in_order=visited, shortest_path=path, success=True)


def _exhausted(visited: List[Node]) -> AlgorithmResult:
    logger.debug("Frontier exhausted after %d expansions, no path", len(visited))
    return AlgorithmResult(visited_nodes_in_order=visited, shortest_path=[], success=False)


def _missing_endpoint(name: str) -> AlgorithmResult:
    logger.debug("%s: start or end missing, nothing to search", name)
    return AlgorithmResult()


def bfs(grid: Grid) -> AlgorithmResult:
    """
    Breadth-first search.
    FIFO frontier, unit cost per step; shortest path by edge count.
    """
    run = SearchRun(grid)
    if not run.has_endpoints:
        return _missing_endpoint("bfs")

    visited: List[Node] = []
    start_state = run.state(run.start)
    start_state.distance = 0
    start_state.is_visited = True
    queue = deque([run.start])

    while queue:
        current = queue.popleft()
        visited.append(current)

        if current.type == NodeType.END:
            return _found(run, current, visited)

        current_state = run.state(current)
        for neighbor in neighbors(current, run.grid):
            state = run.state(neighbor)
            if state.is_visited:
                continue
            state.is_visited = True
            state.distance = current_state.distance + 1
            state.parent = current.coord
            queue.append(neighbor)

    return _exhausted(visited)


def dfs(grid: Grid) -> AlgorithmResult:
    """
    Depth-first search.
    LIFO frontier; no optimality guarantee. Neighbors are pushed in reverse
    so they are expanded in up, down, left, right order.
    """
    run = SearchRun(grid)
    if not run.has_endpoints:
        return _missing_endpoint("dfs")

    visited: List[Node] = []
    run.state(run.start).is_visited = True
    stack = [run.start]

    while stack:
        current = stack.pop()
        visited.append(current)

        if current.type == NodeType.END:
            return _found(run, current, visited)

        for neighbor in reversed(neighbors(current, run.grid)):
            state = run.state(neighbor)
            if state.is_visited:
                continue
            state.is_visited = True
            state.parent = current.coord
            stack.append(neighbor)

    return _exhausted(visited)


def dijkstra(grid: Grid) -> AlgorithmResult:
    """
    Dijkstra's algorithm with terrain weights.
    Entering a node costs its terrain value. Stale frontier entries are
    skipped when popped instead of being removed.
    """
    run = SearchRun(grid)
    if not run.has_endpoints:
        return _missing_endpoint("dijkstra")

    visited: List[Node] = []
    frontier: PriorityQueue[Node] = PriorityQueue(key=lambda node: (run.state(node).distance,))

    run.state(run.start).distance = 0
    frontier.put(run.start)

    while not frontier.is_empty():
        current = frontier.get()
        current_state = run.state(current)

        # Stale duplicate
        if current_state.is_visited:
            continue

        current_state.is_visited = True
        visited.append(current)

        if current.type == NodeType.END:
            return _found(run, current, visited)

        for neighbor in neighbors(current, run.grid):
            state = run.state(neighbor)
            if state.is_visited:
                continue

            new_distance = current_state.distance + int(neighbor.terrain)
            if new_distance < state.distance:
                state.distance = new_distance
                state.parent = current.coord
                frontier.put(neighbor)

    return _exhausted(visited)


def astar(grid: Grid, heuristic: HeuristicId = "manhattan") -> AlgorithmResult:
    """
    A* search.
    Orders the frontier by f = g + h and breaks ties on lower h (the node
    nearer the goal). Optimal by terrain cost for an admissible heuristic.
    """
    run = SearchRun(grid)
    if not run.has_endpoints:
        return _missing_endpoint("astar")

    h = get_heuristic(heuristic)
    end_node = run.end
    visited: List[Node] = []

    def priority(node: Node):
        state = run.state(node)
        return (state.f_score, state.heuristic)

    open_set: PriorityQueue[Node] = PriorityQueue(key=priority)

    start_state = run.state(run.start)
    start_state.g_score = 0
    start_state.heuristic = h(run.start, end_node)
    start_state.f_score = start_state.heuristic
    open_set.put(run.start)

    while not open_set.is_empty():
        current = open_set.get()
        current_state = run.state(current)

        # Already in the closed set
        if current_state.is_visited:
            continue

        current_state.is_visited = True
        visited.append(current)

        if current.type == NodeType.END:
            return _found(run, current, visited)

        for neighbor in neighbors(current, run.grid):
            state = run.state(neighbor)
            if state.is_visited:
                continue

            tentative_g = current_state.g_score + int(neighbor.terrain)
            if tentative_g < state.g_score:
                state.parent = current.coord
                state.g_score = tentative_g
                state.heuristic = h(neighbor, end_node)
                state.f_score = tentative_g + state.heuristic
                open_set.put(neighbor)

    return _exhausted(visited)


def greedy(grid: Grid, heuristic: HeuristicId = "manhattan") -> AlgorithmResult:
    """
    Greedy best-first search.
    Always expands the node with the lowest heuristic; ignores path cost
    and terrain, so the path is not guaranteed to be shortest.
    """
    run = SearchRun(grid)
    if not run.has_endpoints:
        return _missing_endpoint("greedy")

    h = get_heuristic(heuristic)
    end_node = run.end
    visited: List[Node] = []
    open_set: PriorityQueue[Node] = PriorityQueue(key=lambda node: (run.state(node).heuristic,))

    start_state = run.state(run.start)
    start_state.heuristic = h(run.start, end_node)
    start_state.is_visited = True
    open_set.put(run.start)

    while not open_set.is_empty():
        current = open_set.get()
        visited.append(current)

        if current.type == NodeType.END:
            return _found(run, current, visited)

        for neighbor in neighbors(current, run.grid):
            state = run.state(neighbor)
            if state.is_visited:
                continue
            state.is_visited = True
            state.parent = current.coord
            state.heuristic = h(neighbor, end_node)
            open_set.put(neighbor)

    return _exhausted(visited)
