"""
Drawing tools for Open Pixel.

A tool turns a pointer gesture into edits. Every tool has the signature
``tool(pos, state, dispatch) -> continuation or None``: it performs its
initial write through ``dispatch`` and may return a continuation
``continuation(pos, state)`` that the session calls for each later drag
position, passing the latest state.

Functions:
    draw_tool: Freehand drawing, one cell per reported pointer position
    rectangle_tool: Filled rectangle between the gesture start and the pointer
    fill_tool: Flood fill of the 4-connected region under the pointer
    pick_tool: Select the color under the pointer
    rectangle_cells: Cells of the inclusive rectangle between two corners
    flood_region: Cells reached by a flood fill from a start position
"""

from collections import deque
from typing import Any, Callable, List, Optional, Sequence, Set, Tuple

from OP_Libs.constants import ACTION_COLOR, ACTION_PICTURE, TOOL_DRAW, TOOL_FILL, TOOL_PICK, TOOL_RECTANGLE
from OP_Libs.HistoryLib.app_state import ApplicationState, Dispatch
from OP_Libs.RasterLib.raster import GridPos, PixelWrite, Raster

Continuation = Callable[[Any, ApplicationState], None]
Tool = Callable[[Any, ApplicationState, Dispatch], Optional[Continuation]]

# Up, down, left, right
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _as_pos(pos: Any) -> GridPos:
    if isinstance(pos, GridPos):
        return pos
    x, y = pos
    return GridPos(int(x), int(y))


def draw_tool(pos: Any, state: ApplicationState, dispatch: Dispatch) -> Continuation:
    """
    Paint the cell under the pointer, then every cell the drag reports.

    Positions are not interpolated: a fast drag that skips cells leaves gaps.
    """
    def draw_pixel(pos: Any, state: ApplicationState) -> None:
        x, y = _as_pos(pos)
        drawn = [PixelWrite(x, y, state.color)]
        dispatch({ACTION_PICTURE: state.picture.with_edits(drawn)})

    draw_pixel(pos, state)
    return draw_pixel


def rectangle_cells(start: Any, end: Any) -> List[GridPos]:
    """
    List the cells of the inclusive axis-aligned rectangle spanned by two corners.

    Corners may be given in any order. Cells are listed row by row.
    """
    start, end = _as_pos(start), _as_pos(end)
    x_start, x_end = min(start.x, end.x), max(start.x, end.x)
    y_start, y_end = min(start.y, end.y), max(start.y, end.y)
    return [
        GridPos(x, y)
        for y in range(y_start, y_end + 1)
        for x in range(x_start, x_end + 1)
    ]


def rectangle_tool(start: Any, state: ApplicationState, dispatch: Dispatch) -> Continuation:
    """
    Draw a filled rectangle from the gesture start to the pointer.

    Each call redraws the whole rectangle over the picture as it was when the
    gesture began, so dragging replaces the previous preview instead of
    accumulating with it.
    """
    start = _as_pos(start)
    base_picture = state.picture

    def draw_rectangle(pos: Any, state: ApplicationState) -> None:
        drawn = [PixelWrite(x, y, state.color) for x, y in rectangle_cells(start, pos)]
        dispatch({ACTION_PICTURE: base_picture.with_edits(drawn)})

    draw_rectangle(start, state)
    return draw_rectangle


def flood_region(picture: Raster, start: Any) -> List[GridPos]:
    """
    Find the 4-connected region of same-colored cells containing start.

    Breadth-first search from start. The target color is read once; a
    neighbor is admitted when it is in bounds, has the target color and has
    not been admitted before, which bounds the search by the grid size.

    Args:
        picture: The raster to search
        start: Start position, must be in bounds

    Returns:
        Admitted cells in visiting order, starting with start

    Raises:
        OutOfBoundsError: If start is outside the grid
    """
    start = _as_pos(start)
    target_color = picture.pixel_at(start.x, start.y)

    region: List[GridPos] = [start]
    visited: Set[GridPos] = {start}
    frontier = deque([start])

    while frontier:
        current = frontier.popleft()
        for dx, dy in NEIGHBOR_OFFSETS:
            neighbor = GridPos(current.x + dx, current.y + dy)
            if neighbor in visited or not picture.in_bounds(neighbor.x, neighbor.y):
                continue
            if picture.pixel_at(neighbor.x, neighbor.y) != target_color:
                continue
            visited.add(neighbor)
            region.append(neighbor)
            frontier.append(neighbor)

    return region


def fill_tool(start: Any, state: ApplicationState, dispatch: Dispatch) -> None:
    """Recolor the region under the pointer. Single-shot: dragging does nothing."""
    drawn = [PixelWrite(x, y, state.color) for x, y in flood_region(state.picture, start)]
    dispatch({ACTION_PICTURE: state.picture.with_edits(drawn)})
    return None


def pick_tool(pos: Any, state: ApplicationState, dispatch: Dispatch) -> None:
    """Make the color under the pointer the active color."""
    x, y = _as_pos(pos)
    dispatch({ACTION_COLOR: state.picture.pixel_at(x, y)})
    return None


BASE_TOOLS: Sequence[Tuple[str, Tool, str]] = (
    (TOOL_DRAW, draw_tool, "Paint single cells while dragging"),
    (TOOL_FILL, fill_tool, "Flood fill the connected region under the pointer"),
    (TOOL_RECTANGLE, rectangle_tool, "Drag out a filled rectangle"),
    (TOOL_PICK, pick_tool, "Pick the color under the pointer"),
)
