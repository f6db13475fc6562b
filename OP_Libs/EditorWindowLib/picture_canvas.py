"""
Canvas widget for Open Pixel.

Paints the picture one scale x scale square per cell and forwards mouse
and touch input to the session as grid positions.
"""

import logging
from typing import List, Optional

from PyQt5.QtCore import QEvent, Qt
from PyQt5.QtGui import QColor, QPainter
from PyQt5.QtWidgets import QMessageBox, QWidget

from OP_Libs.RasterLib.errors import PixelEditorError
from OP_Libs.RasterLib.raster import GridPos, Raster
from OP_Libs.SessionLib.editor_session import PixelEditorSession, pointer_position

logger = logging.getLogger(__name__)


class PictureCanvas(QWidget):
    def __init__(self, picture: Raster, session: PixelEditorSession, scale: int, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.session = session
        self.scale = scale
        self.picture: Optional[Raster] = None
        self.setAttribute(Qt.WA_AcceptTouchEvents, True)
        self.sync_state(picture)

    def sync_state(self, picture: Raster) -> None:
        if self.picture is picture:
            return
        self.picture = picture
        self.setFixedSize(picture.width * self.scale, picture.height * self.scale)
        self.update()

    def paintEvent(self, event) -> None:
        if self.picture is None:
            return

        painter = QPainter(self)
        scale = self.scale
        for y, row in enumerate(self.picture.rows()):
            for x, color in enumerate(row):
                painter.fillRect(x * scale, y * scale, scale, scale, QColor(color))
        painter.end()

    def _grid_pos(self, x: float, y: float) -> GridPos:
        return pointer_position(x, y, self.scale)

    def _report(self, error: PixelEditorError) -> None:
        logger.error(f"Edit failed: {error}")
        QMessageBox.warning(self, "Edit Failed", str(error))

    def mousePressEvent(self, event) -> None:
        button = 0 if event.button() == Qt.LeftButton else 1
        try:
            self.session.pointer_down(self._grid_pos(event.x(), event.y()), button=button)
        except PixelEditorError as e:
            self.session.pointer_up()
            self._report(e)

    def mouseMoveEvent(self, event) -> None:
        buttons = 0 if event.buttons() == Qt.NoButton else 1
        try:
            self.session.pointer_move(self._grid_pos(event.x(), event.y()), buttons=buttons)
        except PixelEditorError as e:
            self.session.pointer_up()
            self._report(e)

    def mouseReleaseEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self.session.pointer_up()

    def _touch_positions(self, event) -> List[GridPos]:
        return [self._grid_pos(point.pos().x(), point.pos().y()) for point in event.touchPoints()]

    def event(self, event) -> bool:
        event_type = event.type()
        if event_type not in (QEvent.TouchBegin, QEvent.TouchUpdate, QEvent.TouchEnd, QEvent.TouchCancel):
            return super().event(event)

        try:
            if event_type == QEvent.TouchBegin:
                self.session.touch_start(self._touch_positions(event))
            elif event_type == QEvent.TouchUpdate:
                self.session.touch_move(self._touch_positions(event))
            else:
                self.session.touch_end()
        except PixelEditorError as e:
            self.session.touch_end()
            self._report(e)

        event.accept()
        return True
