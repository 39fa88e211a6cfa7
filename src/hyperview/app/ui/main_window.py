"""
Main window: side panel on the left, 4D viewport on the right, and the
frame timer that drives the engine.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QElapsedTimer, QSettings, QTimer, Slot
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QMainWindow, QSplitter

from hyperview import config
from hyperview.app.application import VISIBLE_APP_NAME
from hyperview.app.ui.panels.scene_panel import ScenePanel
from hyperview.app.ui.viewport import Viewport
from hyperview.engine import Engine

logger = logging.getLogger(__name__)

GEOMETRY_KEY = "window/geometry"


class MainWindow(QMainWindow):
    def __init__(self, engine: Engine | None = None):
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)

        self.engine = engine or Engine(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        # ---- Central: panel | viewport ----
        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)

        self.panel = ScenePanel(self.engine, parent=split)
        self.viewport = Viewport(self.engine, parent=split)
        split.addWidget(self.panel)
        split.addWidget(self.viewport)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
        self.setCentralWidget(split)

        self.viewport.selection_changed.connect(self.panel.refresh_objects)
        self.panel.interaction_finished.connect(self.viewport.setFocus)

        settings = QSettings()
        geometry = settings.value(GEOMETRY_KEY)
        if geometry is None or not self.restoreGeometry(geometry):
            self.resize(config.WINDOW_WIDTH + self.panel.sizeHint().width(), config.WINDOW_HEIGHT)

        # ---- Frame loop ----
        self.clock = QElapsedTimer()
        self.timer = QTimer(self)
        self.timer.setInterval(config.FRAME_INTERVAL_MS)
        self.timer.timeout.connect(self._on_tick)

    def start(self) -> None:
        self.clock.start()
        self.timer.start()
        self.viewport.setFocus()
        logger.info(f"Frame loop started ({config.FRAME_INTERVAL_MS} ms interval)")

    @Slot()
    def _on_tick(self) -> None:
        delta_time = self.clock.restart() / 1000.0
        try:
            self.viewport.render_frame(delta_time)
        except Exception:
            # one traceback, not sixty per second
            logger.exception("Frame failed; stopping the frame loop.")
            self.timer.stop()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.timer.stop()
        QSettings().setValue(GEOMETRY_KEY, self.saveGeometry())
        super().closeEvent(event)
