"""
ToolsLib - Drawing tools and their registry

This module contains the tool algorithms that turn pointer gestures into
picture edits, and the name -> tool registry widgets select from.
"""

from OP_Libs.ToolsLib.drawing_tools import (
    Continuation,
    Tool,
    draw_tool,
    rectangle_tool,
    fill_tool,
    pick_tool,
    rectangle_cells,
    flood_region,
)
from OP_Libs.ToolsLib.tool_registry import (
    ToolRegistry,
    get_default_registry,
    register_default_tools,
)

__all__ = [
    "Continuation",
    "Tool",
    "draw_tool",
    "rectangle_tool",
    "fill_tool",
    "pick_tool",
    "rectangle_cells",
    "flood_region",
    "ToolRegistry",
    "get_default_registry",
    "register_default_tools",
]
