from __future__ import annotations

from PySide6.QtWidgets import QWidget

from hyperview.engine import Engine


class BasePanel(QWidget):
    """Base class for side panels. Holds a reference to the engine."""
    def __init__(self, engine: Engine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.engine = engine
