"""Run status of the visualizer: idle, replaying, paused or finished."""

import logging
from enum import Enum
from typing import Callable, Dict, FrozenSet, Optional

logger = logging.getLogger(__name__)


class RunState(Enum):
    """States of a visualization run."""
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETE = "complete"
    NO_PATH = "no_path"


# A finished or paused run only leaves through IDLE (clear path)
_NEXT_STATES: Dict[RunState, FrozenSet[RunState]] = {
    RunState.IDLE: frozenset({RunState.RUNNING}),
    RunState.RUNNING: frozenset({RunState.PAUSED, RunState.COMPLETE, RunState.NO_PATH}),
    RunState.PAUSED: frozenset({RunState.RUNNING, RunState.IDLE}),
    RunState.COMPLETE: frozenset({RunState.IDLE}),
    RunState.NO_PATH: frozenset({RunState.IDLE}),
}

_DESCRIPTIONS = {
    RunState.IDLE: "Ready to start",
    RunState.RUNNING: "Visualizing",
    RunState.PAUSED: "Paused",
    RunState.COMPLETE: "Path found",
    RunState.NO_PATH: "No path exists",
}

EnterCallback = Callable[[Optional[dict]], None]


class RunStateMachine:
    """
    Tracks whether a search is being replayed onto the grid.

    While RUNNING or PAUSED the grid is locked against edits. COMPLETE and
    NO_PATH record how the last run ended until the path is cleared.
    """

    def __init__(self):
        self._state = RunState.IDLE
        self._on_enter: Dict[RunState, EnterCallback] = {}

    @property
    def current_state(self) -> RunState:
        return self._state

    def can_transition_to(self, target: RunState) -> bool:
        return target in _NEXT_STATES[self._state]

    def transition_to(self, target: RunState, context: Optional[dict] = None) -> bool:
        """
        Move to ``target`` and fire its enter callback.

        Returns False, leaving the state alone, when the move is not allowed
        from the current state.
        """
        if not self.can_transition_to(target):
            logger.debug("Rejected transition %s -> %s", self._state.value, target.value)
            return False

        logger.debug("Run state %s -> %s", self._state.value, target.value)
        self._state = target

        callback = self._on_enter.get(target)
        if callback is not None:
            callback(context)
        return True

    def on_state_enter(self, state: RunState, callback: EnterCallback):
        """Register the callback fired each time ``state`` is entered."""
        self._on_enter[state] = callback

    def reset(self):
        """Force IDLE without firing callbacks (used when the grid is rebuilt)."""
        self._state = RunState.IDLE

    # Status flags

    def is_running(self) -> bool:
        return self._state == RunState.RUNNING

    def is_paused(self) -> bool:
        return self._state == RunState.PAUSED

    def is_idle(self) -> bool:
        return self._state == RunState.IDLE

    def is_finished(self) -> bool:
        return self._state in (RunState.COMPLETE, RunState.NO_PATH)

    def is_busy(self) -> bool:
        """Grid edits are locked."""
        return self._state in (RunState.RUNNING, RunState.PAUSED)

    # Named transitions

    def start(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(RunState.RUNNING, context)

    def pause(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(RunState.PAUSED, context)

    def resume(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(RunState.RUNNING, context)

    def complete(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(RunState.COMPLETE, context)

    def fail_no_path(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(RunState.NO_PATH, context)

    def reset_to_idle(self, context: Optional[dict] = None) -> bool:
        return self.transition_to(RunState.IDLE, context)

    def get_state_description(self) -> str:
        return _DESCRIPTIONS[self._state]
