"""
QImage Drawing Surface
======================
The Qt implementation of the `DrawingSurface` protocol.

Why is this file needed?
------------------------
1. The renderer issues many small draw calls per frame. Opening a QPainter
   for each one is slow, so draw calls go through a painter opened once by
   `painting()` for the whole frame.
2. Lines whose endpoints are both far outside the image are culled before
   they reach Qt.
"""
from __future__ import annotations

from contextlib import contextmanager
import logging
from typing import Iterator, Optional, TYPE_CHECKING

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QFont, QImage, QPainter, QPen

from hyperview import config

if TYPE_CHECKING:
    from hyperview.model.colors import Color
    from hyperview.model.vectors import Vector2D

logger = logging.getLogger(__name__)


def _qcolor(color: Color) -> QColor:
    return QColor(*color)


class QImageSurface:
    """Off-screen raster target; the viewport blits `image` on paint."""

    def __init__(self, width: int, height: int, cull_margin: int = config.CULL_MARGIN) -> None:
        self.width = max(1, width)
        self.height = max(1, height)
        self.cull_margin = cull_margin
        self.image = QImage(self.width, self.height, QImage.Format.Format_RGB32)
        self.image.fill(_qcolor(config.BACKGROUND_COLOR))
        self.font = QFont("Arial", 10)
        self._painter: Optional[QPainter] = None

    # ---- frame ----

    @contextmanager
    def painting(self) -> Iterator[QImageSurface]:
        """Keep one QPainter open on the image for the duration of a frame."""
        painter = QPainter(self.image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setFont(self.font)
        self._painter = painter
        try:
            yield self
        finally:
            self._painter = None
            painter.end()

    def _require_painter(self) -> QPainter:
        if self._painter is None:
            raise RuntimeError("Draw call outside of QImageSurface.painting().")
        return self._painter

    def resize(self, width: int, height: int) -> None:
        """Replace the image; contents are not preserved."""
        if self._painter is not None:
            raise RuntimeError("Cannot resize while painting.")
        self.width = max(1, width)
        self.height = max(1, height)
        self.image = QImage(self.width, self.height, QImage.Format.Format_RGB32)
        self.image.fill(_qcolor(config.BACKGROUND_COLOR))

    # ---- DrawingSurface ----

    def clear(self, background: Color) -> None:
        painter = self._require_painter()
        painter.fillRect(QRectF(0, 0, self.width, self.height), _qcolor(background))

    def draw_line(self, start: Vector2D, end: Vector2D, color: Color) -> None:
        if not (self._is_near(start) or self._is_near(end)):
            return
        painter = self._require_painter()
        painter.setPen(QPen(_qcolor(color), 1))
        painter.drawLine(QPointF(start.x, start.y), QPointF(end.x, end.y))

    def draw_point(self, point: Vector2D, color: Color, size: int = 3) -> None:
        painter = self._require_painter()
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(_qcolor(color))
        radius = size / 2
        painter.drawEllipse(QPointF(point.x, point.y), radius, radius)
        painter.setBrush(Qt.BrushStyle.NoBrush)

    def draw_text(self, text: str, position: Vector2D, color: Color) -> None:
        # `position` is the top-left corner of the text, Qt wants the baseline
        painter = self._require_painter()
        painter.setPen(_qcolor(color))
        ascent = painter.fontMetrics().ascent()
        painter.drawText(QPointF(position.x, position.y + ascent), text)

    def _is_near(self, point: Vector2D) -> bool:
        m = self.cull_margin
        return -m <= point.x <= self.width + m and -m <= point.y <= self.height + m
