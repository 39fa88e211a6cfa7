from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeyEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from hyperview import config
from hyperview.app.keymap import SELECT_NEXT_KEY, command_for_key
from hyperview.app.ui.canvas import QImageSurface
from hyperview.engine import Engine


class Viewport(QWidget):
    """
    Widget that shows the engine's frames and forwards key presses to it.

    The engine draws into `canvas` off-screen; `paintEvent` only blits the
    finished image.
    """
    selection_changed = Signal()

    def __init__(self, engine: Engine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.engine = engine
        self.canvas = QImageSurface(engine.width, engine.height)

        self.setMinimumSize(config.MIN_WINDOW_WIDTH, config.MIN_WINDOW_HEIGHT)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)

    def render_frame(self, delta_time: float) -> None:
        """Advance the engine by `delta_time` seconds and schedule a repaint."""
        with self.canvas.painting():
            self.engine.tick(delta_time, self.canvas)
        self.update()

    # ---- Qt events ----

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.drawImage(0, 0, self.canvas.image)
        painter.end()

    def resizeEvent(self, event: QResizeEvent) -> None:
        size = event.size()
        self.canvas.resize(size.width(), size.height())
        self.engine.resize(self.canvas.width, self.canvas.height)
        super().resizeEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == SELECT_NEXT_KEY:
            self.engine.select_next_object()
            self.selection_changed.emit()
            return
        command = command_for_key(event.key())
        if command is None:
            super().keyPressEvent(event)
            return
        self.engine.handle_command(command, pressed=True)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        command = command_for_key(event.key())
        if command is None:
            super().keyReleaseEvent(event)
            return
        self.engine.handle_command(command, pressed=False)

    def focusNextPrevChild(self, next: bool) -> bool:
        # Tab selects the next object instead of moving focus
        return False
