"""
4D Objects (Canonical vs. Working Pose)
=======================================
An `Object4D` wraps one generated shape and tracks two poses:

- canonical: the reference vertices, stored once right after generation;
- working: what is currently displayed, always recomputed from the
  canonical pose by `apply_transform`.

Transforms pivot on the centroid of the canonical vertices, so every object
spins about its own center rather than the world origin.
"""
from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

import numpy as np

from hyperview.model.matrix import Matrix4D
from hyperview.model.shapes import ShapeKind, ShapeParams, generate
from hyperview.model.vectors import Vector4D

if TYPE_CHECKING:
    import numpy.typing as npt
    from hyperview.model.edges import Edge

logger = logging.getLogger(__name__)


class Object4D:
    """A polytope or manifold placed in the scene."""

    def __init__(
        self,
        params: ShapeParams,
        offset: Optional[Vector4D] = None,
        name: Optional[str] = None,
    ) -> None:
        """
        Args:
            params: Shape parameters; the shape kind follows from their type.
            offset: Optional placement in 4D, baked into the canonical pose.
            name: Display name. Defaults to the shape's display name.
        """
        self.offset = offset or Vector4D()
        self.name = name or params.KIND.display_name
        self.params = params

        self.edges: list[Edge] = []
        self.centroid = Vector4D()
        self.last_transform = Matrix4D.identity()
        self._canonical: npt.NDArray[np.float64] = np.empty((0, 4), dtype=np.float64)
        self._working: npt.NDArray[np.float64] = np.empty((0, 4), dtype=np.float64)

        self.regenerate(params)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name='{self.name}', "
            f"vertices={self.vertex_count}, edges={self.edge_count})"
        )

    # ---- properties ----

    @property
    def kind(self) -> ShapeKind:
        return self.params.KIND

    @property
    def vertex_count(self) -> int:
        return int(self._canonical.shape[0])

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def canonical_vertices(self) -> list[Vector4D]:
        return [Vector4D.from_array(row) for row in self._canonical]

    @property
    def working_vertices(self) -> list[Vector4D]:
        return [Vector4D.from_array(row) for row in self._working]

    @property
    def canonical_points(self) -> npt.NDArray[np.float64]:
        """Read-only (N, 4) view of the canonical pose."""
        view = self._canonical.view()
        view.flags.writeable = False
        return view

    @property
    def working_points(self) -> npt.NDArray[np.float64]:
        """Read-only (N, 4) view of the working pose."""
        view = self._working.view()
        view.flags.writeable = False
        return view

    # ---- lifecycle ----

    def regenerate(self, params: ShapeParams) -> None:
        """Rebuild geometry for new parameters and reset the working pose."""
        geometry = generate(params)
        self.params = params
        self.edges = geometry.edges
        self._store_canonical(geometry.vertices + self.offset.to_array())
        self.reset_transform()

    def _store_canonical(self, vertices: npt.NDArray[np.float64]) -> None:
        """Freeze the reference pose and compute its centroid."""
        self._canonical = np.array(vertices, dtype=np.float64).reshape(-1, 4)
        if self._canonical.shape[0] == 0:
            self.centroid = Vector4D()
        else:
            self.centroid = Vector4D.from_array(self._canonical.mean(axis=0))

    # ---- transforms ----

    def apply_transform(self, matrix: Matrix4D) -> None:
        """
        Replace the working pose with `matrix` applied to the canonical pose.

        Each vertex is moved to the centroid frame, transformed, and moved
        back. The previous working pose is discarded, so repeated calls never
        accumulate.
        """
        self._working = self._about_centroid(matrix, self._canonical)
        self.last_transform = matrix

    def apply_incremental(self, matrix: Matrix4D) -> None:
        """
        Apply `matrix` on top of the current working pose.

        Used by the cumulative rotation mode only; floating-point error and
        the effective angle both grow from frame to frame.
        """
        self._working = self._about_centroid(matrix, self._working)
        self.last_transform = matrix.multiply(self.last_transform)

    def reset_transform(self) -> None:
        """Restore the canonical pose exactly."""
        self._working = self._canonical.copy()
        self.last_transform = Matrix4D.identity()

    def _about_centroid(self, matrix: Matrix4D, points: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        center = self.centroid.to_array()
        return matrix.transform_points(points - center) + center
