"""
Application state model for Open Pixel.

Classes:
    ApplicationState: Immutable snapshot of the editor (tool, color, picture, history)

Functions:
    initial_state: Build the start state from an EditorConfig
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

from OP_Libs.RasterLib.colors import Color
from OP_Libs.RasterLib.raster import Raster

Action = Dict[str, Any]
Dispatch = Callable[[Action], None]


@dataclass(frozen=True)
class ApplicationState:
    """
    Immutable snapshot of the editor.

    Attributes:
        tool: Name of the active tool
        color: Active "#rrggbb" color
        picture: Current raster, reflecting every dispatched edit not undone
        done: Saved pre-edit rasters, most recent first
        done_at: Clock reading of the last checkpoint; None when no
            coalescing window is open
    """

    tool: str
    color: Color
    picture: Raster
    done: Tuple[Raster, ...] = field(default_factory=tuple)
    done_at: Optional[float] = None

    @property
    def can_undo(self) -> bool:
        return len(self.done) > 0


def initial_state(config: Optional[Any] = None) -> ApplicationState:
    """
    Build the editor start state.

    Args:
        config: Optional EditorConfig; defaults to a 70x50 "#f0f0f0" picture
            with the draw tool and black selected

    Returns:
        A fresh ApplicationState with empty history
    """
    if config is None:
        from OP_Libs.editor_config import EditorConfig
        config = EditorConfig()

    return ApplicationState(
        tool=config.tool,
        color=config.color,
        picture=Raster.empty(config.width, config.height, config.background),
    )
