"""
OP_Libs - Open Pixel Library Modules

This package contains core functionality for the Open Pixel editor,
organized into specialized sub-packages:

- RasterLib: Immutable raster model, colors and errors
- ToolsLib: Drawing tool algorithms and the tool registry
- HistoryLib: Application state, action validation and the undo reducer
- SessionLib: Editing session and pointer gesture handling
- ImageCodecLib: Raster import and export
- EditorWindowLib: PyQt5 canvas, controls and main window
"""

__version__ = "0.1.0"
