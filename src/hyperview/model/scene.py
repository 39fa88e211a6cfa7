"""
Scene (Object Collection)
=========================
An ordered list of objects plus a selection cursor.

Invariants:
    - A non-empty scene always has exactly one selected object.
    - Removing the selected object re-selects index 0 (or clears the
      selection when the scene becomes empty).
    - Selecting an out-of-range index, or removing an object that is not
      in the scene, is ignored.
"""
from __future__ import annotations

import logging
from typing import Iterator, Optional

from hyperview.model.matrix import Matrix4D
from hyperview.model.objects import Object4D
from hyperview.model.shapes import (
    HypersphereParams, PentachoronParams, ShapeParams, TesseractParams, ToratopeParams
)
from hyperview.model.vectors import Vector4D

logger = logging.getLogger(__name__)


class Scene:
    def __init__(self) -> None:
        self.objects: list[Object4D] = []
        self.selected_index: Optional[int] = None

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Object4D]:
        return iter(self.objects)

    @property
    def selected(self) -> Optional[Object4D]:
        if self.selected_index is None:
            return None
        return self.objects[self.selected_index]

    def add(self, obj: Object4D) -> Object4D:
        """Append an object; the first object added becomes selected."""
        self.objects.append(obj)
        if self.selected_index is None:
            self.selected_index = 0
        return obj

    def remove(self, obj: Object4D) -> None:
        if obj not in self.objects:
            logger.debug(f"Ignoring removal of {obj!r} (not in scene)")
            return
        index = self.objects.index(obj)
        self.objects.pop(index)

        if not self.objects:
            self.selected_index = None
        elif index == self.selected_index:
            self.selected_index = 0
        elif self.selected_index is not None and index < self.selected_index:
            # keep the same object selected after the shift
            self.selected_index -= 1

    def select(self, index: int) -> None:
        if 0 <= index < len(self.objects):
            self.selected_index = index
        else:
            logger.debug(f"Ignoring selection of index {index} (scene has {len(self.objects)} objects)")

    def select_next(self) -> None:
        if self.objects:
            current = self.selected_index if self.selected_index is not None else -1
            self.selected_index = (current + 1) % len(self.objects)

    def regenerate(self, index: int, params: ShapeParams) -> None:
        """Rebuild an object's geometry in place, keeping its placement."""
        if 0 <= index < len(self.objects):
            self.objects[index].regenerate(params)

    def targets(self, apply_to_all: bool = False) -> list[Object4D]:
        """Objects affected by a transform: all of them, or just the selection."""
        if apply_to_all:
            return list(self.objects)
        selected = self.selected
        return [selected] if selected is not None else []

    def apply_transform(self, matrix: Matrix4D, apply_to_all: bool = False) -> None:
        for obj in self.targets(apply_to_all):
            obj.apply_transform(matrix)

    def reset_all(self) -> None:
        for obj in self.objects:
            obj.reset_transform()


def create_demo_scene() -> Scene:
    """One of each shape; the hypersphere sits two units along +X."""
    scene = Scene()
    scene.add(Object4D(TesseractParams(size=1.0)))
    scene.add(Object4D(PentachoronParams(size=1.0)))
    scene.add(Object4D(HypersphereParams(radius=0.7, resolution=8), offset=Vector4D(2.0, 0.0, 0.0, 0.0)))
    scene.add(Object4D(ToratopeParams(major_radius=1.5, minor_radius=0.5, resolution=12)))
    logger.info(f"Demo scene created with {len(scene)} objects: {', '.join(o.name for o in scene)}")
    return scene
