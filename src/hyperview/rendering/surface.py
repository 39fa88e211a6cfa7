from __future__ import annotations

from typing import Protocol, runtime_checkable

from hyperview.model.colors import Color
from hyperview.model.vectors import Vector2D


@runtime_checkable
class DrawingSurface(Protocol):
    """
    What the core needs from a raster target.

    Implementations own the pixels; the core only issues draw calls in screen
    coordinates (origin top-left). `draw_line` may cull lines whose endpoints
    are both far outside the visible area.
    """
    width: int
    height: int

    def clear(self, background: Color) -> None: ...
    def draw_line(self, start: Vector2D, end: Vector2D, color: Color) -> None: ...
    def draw_point(self, point: Vector2D, color: Color, size: int = 3) -> None: ...
    def draw_text(self, text: str, position: Vector2D, color: Color) -> None: ...
    def resize(self, width: int, height: int) -> None: ...
