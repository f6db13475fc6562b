"""
Control widgets for the Open Pixel window.

Every control is built as ``Control(state, control_config)`` and exposes
``sync_state(state)``, which the window calls after each state change.
Controls never touch the state themselves; they only dispatch actions.

Classes:
    ToolSelect: Drop-down of registered tool names
    ColorSelect: Swatch button opening a color dialog
    SaveButton: Export the picture as a PNG file
    LoadButton: Import an image file as the picture
    UndoButton: Undo the last checkpoint, disabled while there is none
"""

import logging
from pathlib import Path
from typing import Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor
from PyQt5.QtWidgets import (
    QColorDialog,
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMessageBox,
    QPushButton,
    QWidget,
)

from OP_Libs.constants import (
    ACTION_COLOR,
    ACTION_TOOL,
    CONTROL_BUTTON_STYLE,
    DEFAULT_EXPORT_FILENAME,
    IMAGE_FILE_FILTER,
    PNG_FILE_FILTER,
    TOOL_SELECT_STYLE,
)
from OP_Libs.HistoryLib.actions import undo_action
from OP_Libs.HistoryLib.app_state import ApplicationState
from OP_Libs.SessionLib.editor_session import ControlConfig

logger = logging.getLogger(__name__)


class ToolSelect(QWidget):
    def __init__(self, state: ApplicationState, config: ControlConfig, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.dispatch = config.dispatch

        self.select = QComboBox()
        self.select.setStyleSheet(TOOL_SELECT_STYLE)
        self.select.addItems(config.tools.list_tools())
        for index, name in enumerate(config.tools.list_tools()):
            self.select.setItemData(index, config.tools.get_description(name), Qt.ToolTipRole)
        self.select.setCurrentText(state.tool)
        self.select.currentTextChanged.connect(self._on_changed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(QLabel("Tool:"))
        layout.addWidget(self.select)

    def _on_changed(self, name: str) -> None:
        if name:
            self.dispatch({ACTION_TOOL: name})

    def sync_state(self, state: ApplicationState) -> None:
        if self.select.currentText() != state.tool:
            self.select.blockSignals(True)
            self.select.setCurrentText(state.tool)
            self.select.blockSignals(False)


class ColorSelect(QWidget):
    def __init__(self, state: ApplicationState, config: ControlConfig, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.dispatch = config.dispatch
        self.color = state.color

        self.swatch = QPushButton()
        self.swatch.setFixedSize(40, 24)
        self.swatch.clicked.connect(self.choose_color)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(QLabel("Color:"))
        layout.addWidget(self.swatch)

        self._paint_swatch()

    def _paint_swatch(self) -> None:
        self.swatch.setStyleSheet(f"background-color: {self.color}; border: 1px solid #888;")
        self.swatch.setToolTip(self.color)

    def choose_color(self) -> None:
        color = QColorDialog.getColor(QColor(self.color), self, "Pick color")
        if not color.isValid():
            return
        self.dispatch({ACTION_COLOR: color.name()})

    def sync_state(self, state: ApplicationState) -> None:
        if self.color != state.color:
            self.color = state.color
            self._paint_swatch()


class SaveButton(QPushButton):
    def __init__(self, state: ApplicationState, config: ControlConfig, parent: Optional[QWidget] = None) -> None:
        super().__init__("Save", parent)
        self.save_picture = config.save_picture
        self.setStyleSheet(CONTROL_BUTTON_STYLE)
        self.clicked.connect(self.save)

    def save(self) -> None:
        save_path, _ = QFileDialog.getSaveFileName(
            self, "Save Picture", DEFAULT_EXPORT_FILENAME, PNG_FILE_FILTER
        )
        if not save_path:
            return

        try:
            self.save_picture(Path(save_path))
        except OSError as e:
            logger.error(f"Save failed: {e}")
            QMessageBox.warning(self, "Save Failed", str(e))

    def sync_state(self, state: ApplicationState) -> None:
        pass


class LoadButton(QPushButton):
    def __init__(self, state: ApplicationState, config: ControlConfig, parent: Optional[QWidget] = None) -> None:
        super().__init__("Load", parent)
        self.load_picture = config.load_picture
        self.setStyleSheet(CONTROL_BUTTON_STYLE)
        self.clicked.connect(self.start_load)

    def start_load(self) -> None:
        file_path, _ = QFileDialog.getOpenFileName(self, "Load Picture", "", IMAGE_FILE_FILTER)
        if not file_path:
            return
        self.finish_load(Path(file_path))

    def finish_load(self, file_path: Path) -> None:
        try:
            picture = self.load_picture(file_path)
        except OSError as e:
            logger.error(f"Load failed: {e}")
            QMessageBox.warning(self, "Load Failed", str(e))
            return

        if picture is None:
            QMessageBox.warning(self, "Load Failed", f"{file_path.name} contains no pixels")

    def sync_state(self, state: ApplicationState) -> None:
        pass


class UndoButton(QPushButton):
    def __init__(self, state: ApplicationState, config: ControlConfig, parent: Optional[QWidget] = None) -> None:
        super().__init__("Undo", parent)
        self.dispatch = config.dispatch
        self.setStyleSheet(CONTROL_BUTTON_STYLE)
        self.setEnabled(state.can_undo)
        self.clicked.connect(lambda: self.dispatch(undo_action()))

    def sync_state(self, state: ApplicationState) -> None:
        self.setEnabled(state.can_undo)


BASE_CONTROLS = (ToolSelect, ColorSelect, SaveButton, LoadButton, UndoButton)
