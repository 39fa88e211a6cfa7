from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

from hyperview.model.colors import Color, WHITE

T = TypeVar("T")


@dataclass(frozen=True)
class Edge:
    """
    Topological link between two vertices of an object.

    The edge only stores indices into the owner's vertex list and a display
    color; it never owns geometry.
    """
    start: int
    end: int
    color: Color = WHITE

    def is_valid_for(self, vertex_count: int) -> bool:
        """Both indices address an existing vertex."""
        return 0 <= self.start < vertex_count and 0 <= self.end < vertex_count

    def endpoints(self, vertices: Sequence[T]) -> tuple[T, T] | None:
        """
        Look up both endpoints, or None when an index is out of range.

        Rendering treats None as "skip this edge".
        """
        if not self.is_valid_for(len(vertices)):
            return None
        return vertices[self.start], vertices[self.end]
