"""Controller that runs searches and replays their results onto the grid."""

import logging
import time
from collections import deque
from typing import Deque, NamedTuple, Optional

from PySide6.QtCore import QObject, QTimer, Signal

from ..domain.dispatcher import run_algorithm
from ..domain.path import compute_stats
from ..domain.types import AlgorithmResult, NodeType, RunStats
from .fsm import RunState
from .grid_store import GridStateMachine

logger = logging.getLogger(__name__)


class ReplayStep(NamedTuple):
    row: int
    col: int
    type: NodeType
    delay_ms: int


class PathfinderController(QObject):
    """
    Connects the grid state machine to the algorithms.

    Signals:
        grid_updated: Emitted when the grid changed in bulk
        node_updated: Emitted for each replayed cell (row, col, type value)
        run_finished: Emitted with the AlgorithmResult once replay is done
        stats_updated: Emitted with the RunStats of the finished run
        status_changed: Emitted with the new RunState
    """

    grid_updated = Signal()
    node_updated = Signal(int, int, str)
    run_finished = Signal(object)  # AlgorithmResult
    stats_updated = Signal(object)  # RunStats
    status_changed = Signal(object)  # RunState

    def __init__(self, store: Optional[GridStateMachine] = None):
        super().__init__()

        self._store = store or GridStateMachine()
        self._replay: Deque[ReplayStep] = deque()
        self._result: Optional[AlgorithmResult] = None
        self._pending_stats: Optional[RunStats] = None

        # Timer for paced replay
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_timer_tick)

        self._setup_state_callbacks()

    def _setup_state_callbacks(self):
        """Forward run status changes as a signal."""
        fsm = self._store.run_status
        for state in RunState:
            fsm.on_state_enter(state, lambda context, s=state: self.status_changed.emit(s))

    # Properties

    @property
    def store(self) -> GridStateMachine:
        return self._store

    @property
    def is_replaying(self) -> bool:
        return bool(self._replay)

    # Run control

    def visualize(self) -> Optional[AlgorithmResult]:
        """
        Run the selected algorithm and replay its result onto the grid.
        Returns None when endpoints are missing or a run is in progress.
        """
        store = self._store
        if not store.has_endpoints:
            logger.info("Cannot visualize: start or end is not placed")
            return None
        if store.run_status.is_busy():
            logger.debug("Run already in progress")
            return None

        # Resolve the pacing first so a bad speed fails before the grid locks
        config = store.config
        delay_ms = config.delay_ms

        store.clear_path()
        self.grid_updated.emit()
        store.run_status.start()

        started = time.perf_counter()
        result = run_algorithm(config.algorithm, store.grid, config.heuristic)
        elapsed_ms = (time.perf_counter() - started) * 1000.0

        self._result = result
        self._pending_stats = compute_stats(result, config.algorithm, elapsed_ms)
        self._replay = self._build_replay(result, delay_ms)
        logger.info("%s finished: success=%s visited=%d path=%d",
                    config.algorithm, result.success,
                    len(result.visited_nodes_in_order), len(result.shortest_path))

        if delay_ms <= 0:
            while self._replay:
                self._apply_step(self._replay.popleft())
            self._finish()
        else:
            self._schedule_next()

        return result

    def pause(self) -> bool:
        """Pause a paced replay."""
        if not self._store.run_status.pause():
            return False
        self._timer.stop()
        return True

    def resume(self) -> bool:
        """Resume a paused replay."""
        if not self._store.run_status.resume():
            return False
        self._schedule_next()
        return True

    def clear_path(self):
        """Stop any replay and clear the painted search state."""
        self._timer.stop()
        self._replay.clear()
        if self._store.run_status.is_running():
            self._store.run_status.pause()
        self._store.clear_path()
        self.grid_updated.emit()

    def clear_walls(self):
        if self._store.run_status.is_busy():
            return
        self._store.clear_walls()
        self.grid_updated.emit()

    def reset_grid(self):
        self._timer.stop()
        self._replay.clear()
        self._store.reset_grid()
        self.status_changed.emit(self._store.run_status.current_state)
        self.grid_updated.emit()

    # Replay

    def _build_replay(self, result: AlgorithmResult, delay_ms: int) -> Deque[ReplayStep]:
        """Visited nodes first, then the path; endpoints are never painted."""
        endpoints = {self._store.start_node, self._store.end_node}
        steps: Deque[ReplayStep] = deque()

        for node in result.visited_nodes_in_order:
            if node.coord not in endpoints:
                steps.append(ReplayStep(node.row, node.col, NodeType.VISITED, delay_ms))

        if result.success:
            for node in result.shortest_path:
                if node.coord not in endpoints:
                    steps.append(ReplayStep(node.row, node.col, NodeType.PATH, delay_ms * 2))

        return steps

    def _apply_step(self, step: ReplayStep):
        self._store.update_node(step.row, step.col, type=step.type)
        self.node_updated.emit(step.row, step.col, step.type.value)

    def _schedule_next(self):
        if not self._replay:
            self._finish()
            return
        self._timer.start(self._replay[0].delay_ms)

    def _on_timer_tick(self):
        """Apply one replay step per tick while running."""
        if not self._store.run_status.is_running() or not self._replay:
            return
        self._apply_step(self._replay.popleft())
        self._schedule_next()

    def _finish(self):
        result = self._result
        if result is None:
            return

        self._store.stats = self._pending_stats
        if result.success:
            self._store.run_status.complete({"result": result})
        else:
            self._store.run_status.fail_no_path({"result": result})

        self.stats_updated.emit(self._pending_stats)
        self.run_finished.emit(result)

    def get_statistics(self) -> dict:
        """Get current run statistics for display."""
        stats = self._store.stats
        fsm = self._store.run_status
        return {
            "algorithm": stats.algorithm if stats else None,
            "nodes_visited": stats.nodes_visited if stats else 0,
            "path_length": stats.path_length if stats else 0,
            "execution_time_ms": stats.execution_time_ms if stats else 0.0,
            "path_cost": stats.path_cost if stats else 0,
            "current_state": fsm.current_state.value,
            "state_description": fsm.get_state_description(),
        }
