"""
Main window for Open Pixel.

Lays the canvas out above a row of controls and forwards every state
change from the session to both.

Classes:
    PixelEditorWindow: Canvas plus controls, subscribed to a session

Functions:
    start_pixel_editor: Build a session and the window showing it
"""

from typing import List, Optional, Sequence

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QHBoxLayout, QMainWindow, QVBoxLayout, QWidget

from OP_Libs.constants import DEFAULT_WINDOW_TITLE
from OP_Libs.editor_config import EditorConfig
from OP_Libs.EditorWindowLib.editor_controls import BASE_CONTROLS
from OP_Libs.EditorWindowLib.picture_canvas import PictureCanvas
from OP_Libs.HistoryLib.app_state import ApplicationState
from OP_Libs.SessionLib.editor_session import PixelEditorSession


class PixelEditorWindow(QMainWindow):
    def __init__(self, session: PixelEditorSession, controls: Sequence[type] = BASE_CONTROLS) -> None:
        super().__init__()
        self.session = session
        self.setWindowTitle(DEFAULT_WINDOW_TITLE)

        state = session.state
        control_config = session.control_config()

        self.canvas = PictureCanvas(state.picture, session, session.config.scale)
        self.controls: List[QWidget] = [control(state, control_config) for control in controls]

        self._build_ui()
        self._unsubscribe = session.subscribe(self)

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QVBoxLayout(central)
        controls_row = QHBoxLayout()
        for control in self.controls:
            controls_row.addWidget(control)
        controls_row.addStretch(1)

        root.addWidget(self.canvas, alignment=Qt.AlignLeft | Qt.AlignTop)
        root.addLayout(controls_row)

    def sync_state(self, state: ApplicationState) -> None:
        self.canvas.sync_state(state.picture)
        for control in self.controls:
            control.sync_state(state)

    def closeEvent(self, event) -> None:
        self._unsubscribe()
        super().closeEvent(event)


def start_pixel_editor(
    state: Optional[ApplicationState] = None,
    tools=None,
    controls: Sequence[type] = BASE_CONTROLS,
    config: Optional[EditorConfig] = None,
) -> PixelEditorWindow:
    session = PixelEditorSession(state=state, tools=tools, config=config)
    return PixelEditorWindow(session, controls=controls)
