from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from hyperview.model.colors import Color
from hyperview.model.vectors import Vector2D


@dataclass
class RecordingSurface:
    """Drawing surface that records every call instead of drawing."""
    width: int = 800
    height: int = 600
    calls: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)

    def clear(self, background: Color) -> None:
        self.calls.append(("clear", (background,)))

    def draw_line(self, start: Vector2D, end: Vector2D, color: Color) -> None:
        self.calls.append(("line", (start, end, color)))

    def draw_point(self, point: Vector2D, color: Color, size: int = 3) -> None:
        self.calls.append(("point", (point, color, size)))

    def draw_text(self, text: str, position: Vector2D, color: Color) -> None:
        self.calls.append(("text", (text, position, color)))

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = width, height

    def of(self, kind: str) -> list[tuple[Any, ...]]:
        return [args for name, args in self.calls if name == kind]

    @property
    def texts(self) -> list[str]:
        return [args[0] for args in self.of("text")]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
