"""
Tool Registry for Open Pixel.

This module provides a centralized name -> tool table. Widgets list and
select tools by name; the session looks the active tool up here when a
gesture starts.

Classes:
    ToolRegistry: Registry for drawing tools

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_tools: Register the built-in draw, fill, rectangle and pick tools
"""

from typing import Dict, List, Optional
import logging

from OP_Libs.ToolsLib.drawing_tools import BASE_TOOLS, Tool

logger = logging.getLogger(__name__)


class ToolRegistry:
    """
    Registry for drawing tools.

    Keeps tools in registration order, which is the order selectors
    present them in.

    Example:
        >>> registry = ToolRegistry()
        >>> registry.register("draw", draw_tool, "Paint single cells")
        >>> tool = registry.get_tool("draw")
        >>> continuation = tool(pos, state, dispatch)
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._tools: Dict[str, Tool] = {}
        self._descriptions: Dict[str, str] = {}

    def register(self, name: str, tool: Tool, description: str = "") -> None:
        """
        Register a tool.

        Args:
            name: Unique tool name (e.g., "draw")
            tool: Callable with signature (pos, state, dispatch) -> continuation or None
            description: Human-readable description, shown as the selector tooltip

        Raises:
            ValueError: If name is empty or tool is not callable
            RuntimeError: If name is already registered
        """
        name = str(name).strip()

        if not name:
            raise ValueError("tool name cannot be empty")

        if not callable(tool):
            raise ValueError(f"tool must be callable, got {type(tool)}")

        if name in self._tools:
            raise RuntimeError(f"Tool '{name}' is already registered")

        self._tools[name] = tool
        self._descriptions[name] = str(description)

        logger.debug(f"Registered tool: {name}")

    def get_tool(self, name: str) -> Tool:
        """
        Get a tool by name.

        Raises:
            KeyError: If name is not registered
        """
        name = str(name).strip()

        if name not in self._tools:
            available = ", ".join(self.list_tools())
            raise KeyError(
                f"No tool registered under '{name}'. "
                f"Available tools: {available}"
            )

        return self._tools[name]

    def get_description(self, name: str) -> str:
        """
        Get the description a tool was registered with.

        Raises:
            KeyError: If name is not registered
        """
        name = str(name).strip()

        if name not in self._descriptions:
            raise KeyError(f"No tool registered under '{name}'")

        return self._descriptions[name]

    def has_tool(self, name: str) -> bool:
        return str(name).strip() in self._tools

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_tool(name)

    def __len__(self) -> int:
        return len(self._tools)

    def list_tools(self) -> List[str]:
        """
        Get all registered tool names.

        Returns:
            Tool names in registration order
        """
        return list(self._tools.keys())


# Global singleton registry
_default_registry: Optional[ToolRegistry] = None


def get_default_registry() -> ToolRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers the built-in tools.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = ToolRegistry()
        register_default_tools(_default_registry)

    return _default_registry


def register_default_tools(registry: ToolRegistry) -> None:
    """
    Register the built-in tools: draw, fill, rectangle and pick.

    Args:
        registry: The registry to register tools with
    """
    for name, tool, description in BASE_TOOLS:
        registry.register(name, tool, description)

    logger.info("Registered default tools")
