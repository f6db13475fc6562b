"""
HistoryLib - Application state and undo history

This module holds the editor state model, action validation and the
reducer that folds actions into new states with undo checkpoints.
"""

from OP_Libs.HistoryLib.app_state import Action, ApplicationState, Dispatch, initial_state
from OP_Libs.HistoryLib.actions import undo_action, validate_action
from OP_Libs.HistoryLib.history_reducer import (
    HistoryReducer,
    history_update_state,
    update_state,
)

__all__ = [
    "Action",
    "ApplicationState",
    "Dispatch",
    "initial_state",
    "undo_action",
    "validate_action",
    "HistoryReducer",
    "history_update_state",
    "update_state",
]
