"""
Scene Renderer
==============
Turns projected objects into draw calls on a `DrawingSurface`.

Why is this file needed?
------------------------
1. Separation: the model never talks to a surface, and the surface never
   sees 4D data. This module is the only place where the two meet.
2. Per-shape decoration: every object draws its edges and centroid; labels
   and vertex markers depend on the shape kind and are dispatched here.

Classes:
    Renderer: Draws scenes, single objects and the text overlay.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence, TYPE_CHECKING

from hyperview import config
from hyperview.model import colors
from hyperview.model.shapes import ShapeKind
from hyperview.model.vectors import Vector2D

if TYPE_CHECKING:
    from hyperview.model.objects import Object4D
    from hyperview.model.scene import Scene
    from hyperview.rendering.camera import Camera4D
    from hyperview.rendering.surface import DrawingSurface

logger = logging.getLogger(__name__)

CENTROID_SIZE = 5
VERTEX_SIZE = 7
LINE_HEIGHT = 20


class Renderer:
    def __init__(self, camera: Camera4D) -> None:
        self.camera = camera

    def render_scene(self, surface: DrawingSurface, scene: Scene, render_all: bool = False) -> None:
        """Draw the selected object, or every object when `render_all` is set."""
        objects = list(scene) if render_all else scene.targets()
        for obj in objects:
            self.render_object(surface, obj)

    def render_object(self, surface: DrawingSurface, obj: Object4D) -> None:
        projected = [Vector2D(float(x), float(y)) for x, y in self.camera.project_points(obj.working_points)]

        for edge in obj.edges:
            endpoints = edge.endpoints(projected)
            if endpoints is None:
                continue
            surface.draw_line(endpoints[0], endpoints[1], edge.color)

        center = self.camera.project(obj.centroid)
        surface.draw_point(center, colors.MAGENTA, CENTROID_SIZE)

        match obj.kind:
            case ShapeKind.TESSERACT:
                surface.draw_text("Tesseract", center.offset(dy=-30), colors.CYAN)
            case ShapeKind.TORATOPE:
                surface.draw_text("4D Torus", center.offset(dy=-30), colors.CYAN)
            case ShapeKind.PENTACHORON:
                self._draw_vertex_markers(surface, projected)
                surface.draw_text(obj.name, center.offset(dy=-20), colors.CYAN)
            case ShapeKind.HYPERSPHERE:
                pass

    @staticmethod
    def _draw_vertex_markers(surface: DrawingSurface, projected: Sequence[Vector2D]) -> None:
        """Numbered dot on every vertex, colored like its outgoing edges."""
        for i, point in enumerate(projected):
            color = colors.SOFT_PALETTE[i] if i < len(colors.SOFT_PALETTE) else colors.WHITE
            surface.draw_point(point, color, VERTEX_SIZE)
            surface.draw_text(f"V{i + 1}", point.offset(dx=5, dy=-5), color)

    @staticmethod
    def draw_overlay(
        surface: DrawingSurface,
        lines: Iterable[str],
        origin: Vector2D,
        color: colors.Color = config.OVERLAY_COLOR,
    ) -> None:
        for i, line in enumerate(lines):
            surface.draw_text(line, origin.offset(dy=i * LINE_HEIGHT), color)
