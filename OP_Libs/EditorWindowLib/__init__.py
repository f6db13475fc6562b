"""
EditorWindowLib - PyQt5 editor window

This module provides the canvas widget, the control widgets and the main
window that wire a PixelEditorSession to the screen.
"""

from OP_Libs.EditorWindowLib.editor_controls import (
    BASE_CONTROLS,
    ToolSelect,
    ColorSelect,
    SaveButton,
    LoadButton,
    UndoButton,
)
from OP_Libs.EditorWindowLib.picture_canvas import PictureCanvas
from OP_Libs.EditorWindowLib.pixel_editor_window import PixelEditorWindow, start_pixel_editor

__all__ = [
    "BASE_CONTROLS",
    "ToolSelect",
    "ColorSelect",
    "SaveButton",
    "LoadButton",
    "UndoButton",
    "PictureCanvas",
    "PixelEditorWindow",
    "start_pixel_editor",
]
