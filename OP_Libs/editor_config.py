"""
Editor configuration for Open Pixel.

Classes:
    EditorConfig: Start-state and behavior settings for an editing session

Functions:
    load_editor_config: Load an EditorConfig from a JSON file
    save_editor_config: Write an EditorConfig to a JSON file
"""

from dataclasses import asdict, dataclass
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from OP_Libs.constants import (
    DEFAULT_BACKGROUND,
    DEFAULT_COLOR,
    DEFAULT_HEIGHT,
    DEFAULT_SCALE,
    DEFAULT_TOOL,
    DEFAULT_WIDTH,
    HISTORY_DEBOUNCE_SECONDS,
    MAX_IMPORT_SIZE,
)
from OP_Libs.RasterLib.colors import normalize_color
from OP_Libs.RasterLib.errors import InvalidDimensionError

logger = logging.getLogger(__name__)


@dataclass
class EditorConfig:
    """Configuration for an editing session.

    Attributes:
        width: Columns of the start picture (default: 70)
        height: Rows of the start picture (default: 50)
        background: Fill color of the start picture (default: #f0f0f0)
        color: Initially selected color (default: #000000)
        tool: Initially selected tool (default: draw)
        scale: Screen pixels per cell, used by the canvas only (default: 10)
        debounce_seconds: Window in which picture edits share one undo step (default: 1.0)
        max_import_size: Imported images are clamped to this many cells per side (default: 100)
        history_limit: Maximum undo checkpoints kept, None for unbounded (default: None)
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    background: str = DEFAULT_BACKGROUND
    color: str = DEFAULT_COLOR
    tool: str = DEFAULT_TOOL
    scale: int = DEFAULT_SCALE
    debounce_seconds: float = HISTORY_DEBOUNCE_SECONDS
    max_import_size: int = MAX_IMPORT_SIZE
    history_limit: Optional[int] = None

    def __post_init__(self):
        """Validate and normalize settings."""
        for name in ("width", "height", "max_import_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidDimensionError(f"{name} must be a positive integer, got {value!r}")

        if isinstance(self.scale, bool) or not isinstance(self.scale, int) or self.scale <= 0:
            raise ValueError(f"scale must be a positive integer, got {self.scale!r}")

        self.background = normalize_color(self.background)
        self.color = normalize_color(self.color)

        if not isinstance(self.tool, str) or not self.tool.strip():
            raise ValueError(f"tool must be a non-empty string, got {self.tool!r}")

        self.debounce_seconds = float(self.debounce_seconds)
        if self.debounce_seconds < 0:
            raise ValueError(f"debounce_seconds must be >= 0, got {self.debounce_seconds}")

        if self.history_limit is not None:
            if isinstance(self.history_limit, bool) or not isinstance(self.history_limit, int) \
                    or self.history_limit < 1:
                raise ValueError(f"history_limit must be a positive integer or None, got {self.history_limit!r}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)


def load_editor_config(config_path: Path) -> EditorConfig:
    """
    Load editor settings from a JSON file.

    Args:
        config_path: Path to the JSON config file

    Returns:
        The loaded EditorConfig, or the defaults if the file does not exist

    Raises:
        ValueError: If the file is not valid JSON or holds invalid settings
    """
    config_path = Path(config_path)
    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return EditorConfig()

    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid config file {config_path}: {e}")

    if not isinstance(payload, dict):
        raise ValueError(f"Config file {config_path} must contain a JSON object")

    config = EditorConfig.from_dict(payload)
    logger.info(f"Loaded editor config from {config_path}")
    return config


def save_editor_config(config: EditorConfig, config_path: Path) -> Path:
    config_path = Path(config_path)
    config_path.write_text(json.dumps(config.to_dict(), indent=2), encoding="utf-8")
    return config_path
