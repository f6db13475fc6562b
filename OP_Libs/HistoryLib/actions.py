"""
Action fragments and their boundary validation.

An action is a plain dict: either {"undo": True} or a fragment holding one
or more of "tool", "color" and "picture". Widgets build actions; the
session validates them here before they reach the reducer.
"""

from typing import Any, Dict, Iterable, Optional

from OP_Libs.constants import ACTION_COLOR, ACTION_FIELDS, ACTION_PICTURE, ACTION_TOOL, ACTION_UNDO
from OP_Libs.RasterLib.colors import normalize_color
from OP_Libs.RasterLib.errors import InvalidActionError
from OP_Libs.RasterLib.raster import Raster


def undo_action() -> Dict[str, Any]:
    return {ACTION_UNDO: True}


def validate_action(action: Any, tool_names: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    """
    Validate and normalize an action fragment.

    Args:
        action: The action dictionary produced by a widget or tool
        tool_names: Known tool names; when given, "tool" must be one of them

    Returns:
        A new dictionary with the color normalized to "#rrggbb"

    Raises:
        InvalidActionError: If the action is not a dict, is empty, carries
            unknown keys, or any field has the wrong type or value
    """
    if not isinstance(action, dict):
        raise InvalidActionError(f"Action must be a dict, got {type(action).__name__}")

    if not action:
        raise InvalidActionError("Action must contain at least one field")

    unknown = set(action) - ACTION_FIELDS
    if unknown:
        raise InvalidActionError(f"Unknown action fields: {', '.join(sorted(unknown))}")

    validated = dict(action)

    if ACTION_UNDO in validated:
        if validated[ACTION_UNDO] is not True:
            raise InvalidActionError(f"'undo' must be True, got {validated[ACTION_UNDO]!r}")
        if len(validated) > 1:
            raise InvalidActionError("An undo action cannot carry other fields")
        return validated

    if ACTION_TOOL in validated:
        tool = validated[ACTION_TOOL]
        if not isinstance(tool, str) or not tool.strip():
            raise InvalidActionError(f"'tool' must be a non-empty string, got {tool!r}")
        if tool_names is not None and tool not in set(tool_names):
            raise InvalidActionError(f"Unknown tool: {tool}")

    if ACTION_COLOR in validated:
        try:
            validated[ACTION_COLOR] = normalize_color(validated[ACTION_COLOR])
        except ValueError as e:
            raise InvalidActionError(str(e))

    if ACTION_PICTURE in validated and not isinstance(validated[ACTION_PICTURE], Raster):
        raise InvalidActionError(
            f"'picture' must be a Raster, got {type(validated[ACTION_PICTURE]).__name__}"
        )

    return validated
