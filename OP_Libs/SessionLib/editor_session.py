"""
Editing session for Open Pixel.

The session owns the single ApplicationState. Widgets never change it
directly: they call dispatch() with an action fragment, the session folds
it through the history reducer and then calls sync_state(state) on every
subscribed listener.

Pointer gestures (down, drag, up) are mediated here: the active tool is
invoked on pointer-down, and its continuation, if any, is called with the
latest state for each drag position that lands on a new grid cell.

Classes:
    ControlConfig: What every control is constructed with besides the state
    PixelEditorSession: State owner, dispatch sink and gesture controller

Functions:
    pointer_position: Convert screen coordinates to a grid position
"""

from dataclasses import dataclass, replace
import logging
import math
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Sequence, Union

from OP_Libs.constants import (
    ACTION_COLOR,
    ACTION_PICTURE,
    ACTION_TOOL,
    DEFAULT_EXPORT_FILENAME,
    DEFAULT_TOOL,
)
from OP_Libs.editor_config import EditorConfig
from OP_Libs.HistoryLib.actions import undo_action, validate_action
from OP_Libs.HistoryLib.app_state import Action, ApplicationState, initial_state
from OP_Libs.HistoryLib.history_reducer import Clock, HistoryReducer
from OP_Libs.ImageCodecLib.image_codec import from_bitmap, load_raster, save_raster
from OP_Libs.RasterLib.errors import EmptySourceError
from OP_Libs.RasterLib.raster import GridPos, Raster
from OP_Libs.ToolsLib.drawing_tools import Continuation, Tool
from OP_Libs.ToolsLib.tool_registry import ToolRegistry, get_default_registry

logger = logging.getLogger(__name__)

Listener = Any  # object with sync_state(state), or a callable taking the state


def pointer_position(client_x: float, client_y: float, scale: int, origin: Sequence[float] = (0, 0)) -> GridPos:
    """
    Convert screen coordinates to the grid cell under them.

    Args:
        client_x: Horizontal screen coordinate
        client_y: Vertical screen coordinate
        scale: Screen pixels per cell
        origin: Screen coordinates of the canvas top-left corner

    Returns:
        The grid position (may lie outside the grid)
    """
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")
    return GridPos(
        math.floor((client_x - origin[0]) / scale),
        math.floor((client_y - origin[1]) / scale),
    )


@dataclass
class ControlConfig:
    """Collaborators handed to each control.

    Attributes:
        tools: The tool registry (controls list tool names from it)
        dispatch: Sink for action fragments
        load_picture: Import an image file as the picture (None when it holds no pixels)
        save_picture: Export the current picture to a file
    """
    tools: ToolRegistry
    dispatch: Callable[[Action], None]
    load_picture: Callable[[Path], Optional[Raster]]
    save_picture: Callable[[Optional[Path]], Path]


def _build_registry(tools: Union[ToolRegistry, Mapping[str, Tool]]) -> ToolRegistry:
    if isinstance(tools, ToolRegistry):
        return tools
    registry = ToolRegistry()
    for name, tool in tools.items():
        registry.register(name, tool)
    return registry


class PixelEditorSession:
    """
    Owner of the editor state and mediator of pointer gestures.

    Example:
        >>> session = PixelEditorSession()
        >>> session.set_tool("fill")
        >>> session.pointer_down((0, 0))
        >>> session.undo()
    """

    def __init__(
        self,
        state: Optional[ApplicationState] = None,
        tools: Optional[Union[ToolRegistry, Mapping[str, Tool]]] = None,
        config: Optional[EditorConfig] = None,
        clock: Optional[Clock] = None,
    ):
        self.config = config or EditorConfig()
        self.tools = _build_registry(tools) if tools is not None else get_default_registry()
        self._state = self._checked_start_state(state or initial_state(self.config))
        self._reducer = HistoryReducer.from_config(self.config, clock=clock)
        self._listeners: List[Listener] = []
        self._on_move: Optional[Continuation] = None
        self._last_pos: Optional[GridPos] = None

    @property
    def state(self) -> ApplicationState:
        return self._state

    @property
    def can_undo(self) -> bool:
        return self._state.can_undo

    @property
    def gesture_active(self) -> bool:
        return self._on_move is not None

    def control_config(self) -> ControlConfig:
        return ControlConfig(
            tools=self.tools,
            dispatch=self.dispatch,
            load_picture=self.load_picture,
            save_picture=self.save_picture,
        )

    def _checked_start_state(self, state: ApplicationState) -> ApplicationState:
        if state.tool in self.tools:
            return state

        available = self.tools.list_tools()
        if not available:
            raise ValueError("session needs at least one registered tool")
        fallback = DEFAULT_TOOL if DEFAULT_TOOL in self.tools else available[0]
        logger.warning(f"Unknown start tool '{state.tool}', using '{fallback}'")
        return replace(state, tool=fallback)

    # -- state changes -------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener notified after every state change.

        Args:
            listener: Object with a sync_state(state) method, or a callable

        Returns:
            A function that removes the listener again
        """
        if not callable(getattr(listener, "sync_state", None)) and not callable(listener):
            raise ValueError(f"listener must have sync_state() or be callable, got {type(listener)}")

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> None:
        """
        Validate an action, reduce it into a new state and notify listeners.

        Raises:
            InvalidActionError: If the action fails validation
        """
        action = validate_action(action, self.tools.list_tools())
        new_state = self._reducer(self._state, action)
        if new_state is self._state:
            return

        self._state = new_state
        for listener in list(self._listeners):
            sync_state = getattr(listener, "sync_state", None)
            if callable(sync_state):
                sync_state(new_state)
            else:
                listener(new_state)

    def undo(self) -> None:
        self.dispatch(undo_action())

    def set_tool(self, name: str) -> None:
        self.dispatch({ACTION_TOOL: name})

    def set_color(self, color: Any) -> None:
        self.dispatch({ACTION_COLOR: color})

    # -- gestures ------------------------------------------------------

    def pointer_down(self, pos: Any, button: int = 0) -> bool:
        """
        Start a gesture with the active tool.

        Only the primary button (0) draws. Presses outside the grid are ignored.

        Returns:
            True if the tool returned a continuation, so drags will follow
        """
        if button != 0:
            return False

        pos = GridPos(*pos)
        self.pointer_up()

        if not self._state.picture.in_bounds(pos.x, pos.y):
            return False

        tool = self.tools.get_tool(self._state.tool)
        logger.debug(f"Gesture start: {self._state.tool} at ({pos.x}, {pos.y})")
        on_move = tool(pos, self._state, self.dispatch)

        if on_move is None:
            return False

        self._on_move = on_move
        self._last_pos = pos
        return True

    def pointer_move(self, pos: Any, buttons: int = 1) -> bool:
        """
        Continue the current gesture.

        A move reporting no pressed buttons ends the gesture. Moves to the
        cell last reported, or outside the grid, are dropped.

        Returns:
            True if the continuation was invoked
        """
        if self._on_move is None:
            return False

        if buttons == 0:
            self.pointer_up()
            return False

        pos = GridPos(*pos)
        if pos == self._last_pos or not self._state.picture.in_bounds(pos.x, pos.y):
            return False

        self._last_pos = pos
        self._on_move(pos, self._state)
        return True

    def pointer_up(self) -> None:
        if self._on_move is not None:
            logger.debug("Gesture end")
        self._on_move = None
        self._last_pos = None

    def touch_start(self, points: Sequence[Any]) -> bool:
        """Start a gesture from the first touch point; other points are ignored."""
        if not points:
            return False
        return self.pointer_down(points[0])

    def touch_move(self, points: Sequence[Any]) -> bool:
        if not points:
            return False
        return self.pointer_move(points[0])

    def touch_end(self) -> None:
        self.pointer_up()

    # -- import / export -----------------------------------------------

    def load_picture(self, file_path: Path) -> Optional[Raster]:
        """
        Load an image file as the new picture.

        The image is clamped to the configured import size and dispatched as
        a picture edit, so it can be undone.

        Returns:
            The imported raster, or None when the image holds no pixels

        Raises:
            FileNotFoundError: If the file does not exist
            IOError: If the file cannot be decoded
        """
        file_path = Path(file_path)
        return self._import_picture(
            lambda: load_raster(file_path, max_size=self.config.max_import_size)
        )

    def import_bitmap(self, width: int, height: int, rgba_bytes: Any) -> Optional[Raster]:
        """
        Import a decoded bitmap as the new picture.

        Returns:
            The imported raster, or None when no bitmap was supplied (nothing
            is dispatched in that case)
        """
        return self._import_picture(
            lambda: from_bitmap(width, height, rgba_bytes, max_size=self.config.max_import_size)
        )

    def _import_picture(self, build: Callable[[], Raster]) -> Optional[Raster]:
        try:
            raster = build()
        except EmptySourceError as e:
            logger.warning(f"Import skipped: {e}")
            return None

        self.dispatch({ACTION_PICTURE: raster})
        return raster

    def save_picture(self, file_path: Optional[Path] = None) -> Path:
        """Export the current picture, one image pixel per cell (default: ./pixelart.png)."""
        target = Path(file_path) if file_path else Path.cwd() / DEFAULT_EXPORT_FILENAME
        return save_raster(self._state.picture, target)
