"""
SessionLib - Editing session

This module owns the application state, dispatches actions through the
history reducer and mediates pointer gestures into tool calls.
"""

from OP_Libs.SessionLib.editor_session import (
    ControlConfig,
    PixelEditorSession,
    pointer_position,
)

__all__ = [
    "ControlConfig",
    "PixelEditorSession",
    "pointer_position",
]
