"""
Constants and configuration values for Open Pixel.

This module centralizes all constant values, magic numbers, and
default settings used throughout the editor.
"""

# Start state
DEFAULT_WIDTH = 70
DEFAULT_HEIGHT = 50
DEFAULT_BACKGROUND = "#f0f0f0"
DEFAULT_COLOR = "#000000"
DEFAULT_TOOL = "draw"

# Screen pixels per raster cell
DEFAULT_SCALE = 10

# Picture edits closer together than this (seconds) share one undo step
HISTORY_DEBOUNCE_SECONDS = 1.0

# Imported bitmaps are clamped to this many cells per side
MAX_IMPORT_SIZE = 100

# Tool names
TOOL_DRAW = "draw"
TOOL_FILL = "fill"
TOOL_RECTANGLE = "rectangle"
TOOL_PICK = "pick"

# Action field names
ACTION_UNDO = "undo"
ACTION_TOOL = "tool"
ACTION_COLOR = "color"
ACTION_PICTURE = "picture"
ACTION_FIELDS = {ACTION_UNDO, ACTION_TOOL, ACTION_COLOR, ACTION_PICTURE}

# Export
DEFAULT_EXPORT_FILENAME = "pixelart.png"
DEFAULT_OUTPUT_FORMAT = "PNG"
EXPORT_ALPHA = 255

# Supported import formats
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}
IMAGE_FILE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp)"
PNG_FILE_FILTER = "PNG Images (*.png)"

# Config file
CONFIG_FILE_NAME = "open_pixel.json"

# UI constants
DEFAULT_WINDOW_TITLE = "Open Pixel"
CONTROL_BUTTON_STYLE = (
    "QPushButton { background-color: #000000; color: white; padding: 6px 10px; font-size: 14px; }"
    "QPushButton:hover { background-color: #333333; }"
    "QPushButton:disabled { color: #777777; }"
)
TOOL_SELECT_STYLE = "background-color: black; color: white; border: none; padding: 4px;"
