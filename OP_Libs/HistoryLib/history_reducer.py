"""
Edit reducer with undo history for Open Pixel.

The reducer is a pure function folding an action into a new
ApplicationState. Picture edits that arrive within the debounce window of
the last checkpoint are merged into that checkpoint, so a whole stroke is
undone in one step while a pause starts a new one.

Functions:
    update_state: Merge an action's fields over a state
    history_update_state: Reduce an action with undo checkpointing

Classes:
    HistoryReducer: Reducer bound to a clock, debounce interval and history limit
"""

from dataclasses import replace
import logging
import time
from typing import Any, Callable, Dict, Optional

from OP_Libs.constants import (
    ACTION_COLOR,
    ACTION_PICTURE,
    ACTION_TOOL,
    ACTION_UNDO,
    HISTORY_DEBOUNCE_SECONDS,
)
from OP_Libs.HistoryLib.app_state import ApplicationState

logger = logging.getLogger(__name__)

Clock = Callable[[], float]

_STATE_FIELDS = (ACTION_TOOL, ACTION_COLOR, ACTION_PICTURE)


def update_state(state: ApplicationState, action: Dict[str, Any]) -> ApplicationState:
    """Return a copy of state with the tool/color/picture fields of action applied."""
    changes = {name: action[name] for name in _STATE_FIELDS if name in action}
    if not changes:
        return state
    return replace(state, **changes)


def history_update_state(
    state: ApplicationState,
    action: Dict[str, Any],
    clock: Clock = time.monotonic,
    debounce_seconds: float = HISTORY_DEBOUNCE_SECONDS,
    history_limit: Optional[int] = None,
) -> ApplicationState:
    """
    Reduce an action into a new state, maintaining the undo history.

    Rules, in priority order:
    1. {"undo": True}: restore the most recent checkpoint and close the
       coalescing window. With an empty history the state is returned as-is.
    2. A picture edit arriving more than debounce_seconds after the last
       checkpoint (or with no window open) pushes the pre-edit picture and
       opens a new window at the current clock reading.
    3. Anything else is merged without touching the history.

    Args:
        state: Current application state
        action: Validated action fragment
        clock: Returns the current time in seconds
        debounce_seconds: Length of the coalescing window
        history_limit: Maximum number of checkpoints kept (None = unbounded)

    Returns:
        The new application state
    """
    if action.get(ACTION_UNDO) is True:
        if not state.done:
            return state
        logger.debug(f"Undo: restoring checkpoint, {len(state.done) - 1} remaining")
        return replace(state, picture=state.done[0], done=state.done[1:], done_at=None)

    if ACTION_PICTURE in action:
        now = clock()
        if state.done_at is None or now - state.done_at > debounce_seconds:
            done = (state.picture,) + state.done
            if history_limit is not None and len(done) > history_limit:
                done = done[:history_limit]
            logger.debug(f"Opened undo checkpoint {len(done)} at {now:.3f}")
            return replace(update_state(state, action), done=done, done_at=now)

    return update_state(state, action)


class HistoryReducer:
    """
    Reducer with its time source and history settings bound.

    Example:
        >>> reducer = HistoryReducer(clock=lambda: 0.0)
        >>> state = reducer(state, {"picture": new_picture})
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        debounce_seconds: float = HISTORY_DEBOUNCE_SECONDS,
        history_limit: Optional[int] = None,
    ):
        if debounce_seconds < 0:
            raise ValueError(f"debounce_seconds must be >= 0, got {debounce_seconds}")
        if history_limit is not None and history_limit < 1:
            raise ValueError(f"history_limit must be >= 1 or None, got {history_limit}")

        self.clock = clock or time.monotonic
        self.debounce_seconds = debounce_seconds
        self.history_limit = history_limit

    @classmethod
    def from_config(cls, config: Any, clock: Optional[Clock] = None) -> "HistoryReducer":
        return cls(
            clock=clock,
            debounce_seconds=config.debounce_seconds,
            history_limit=config.history_limit,
        )

    def __call__(self, state: ApplicationState, action: Dict[str, Any]) -> ApplicationState:
        return history_update_state(
            state,
            action,
            clock=self.clock,
            debounce_seconds=self.debounce_seconds,
            history_limit=self.history_limit,
        )

    @staticmethod
    def can_undo(state: ApplicationState) -> bool:
        return state.can_undo
