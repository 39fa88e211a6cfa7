"""
4D Camera
=========
Two-stage perspective projection: 4D -> 3D by dividing along W with
`viewer_distance`, then 3D -> 2D by dividing along Z with `screen_distance`,
followed by the mapping to raster pixels (origin top-left, Y pointing down).
"""
from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

import numpy as np

from hyperview import config
from hyperview.model.vectors import Vector2D, Vector3D, Vector4D

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

AXIS_VECTORS: tuple[Vector4D, ...] = (
    Vector4D(1.0, 0.0, 0.0, 0.0),
    Vector4D(0.0, 1.0, 0.0, 0.0),
    Vector4D(0.0, 0.0, 1.0, 0.0),
    Vector4D(0.0, 0.0, 0.0, 1.0),
)


class Camera4D:
    def __init__(
        self,
        viewer_distance: float = config.VIEWER_DISTANCE,
        screen_distance: float = config.SCREEN_DISTANCE,
        position: Optional[Vector4D] = None,
    ) -> None:
        self.position = position or Vector4D(*config.CAMERA_POSITION)
        self.viewer_distance = max(config.MIN_DISTANCE, viewer_distance)
        self.screen_distance = max(config.MIN_DISTANCE, screen_distance)

        self.screen_center_x: int = 0
        self.screen_center_y: int = 0
        self.scale_x: float = config.DEFAULT_SCALE
        self.scale_y: float = config.DEFAULT_SCALE

    def __repr__(self) -> str:
        p = self.position
        return (
            f"{self.__class__.__name__}(position=({p.x:.2f}, {p.y:.2f}, {p.z:.2f}, {p.w:.2f}), "
            f"viewer_distance={self.viewer_distance:.2f}, screen_distance={self.screen_distance:.2f})"
        )

    # ---- screen ----

    def set_screen_parameters(self, width: int, height: int, scale: float = 1.0) -> None:
        """Center on the surface and scale so a unit spans a quarter of the short side."""
        self.screen_center_x = width // 2
        self.screen_center_y = height // 2
        self.scale_x = scale * min(width, height) / 4
        self.scale_y = scale * min(width, height) / 4
        logger.debug(f"Screen parameters: center=({self.screen_center_x}, {self.screen_center_y}), scale={self.scale_x:.1f}")

    # ---- projection ----

    def project_4d_to_3d(self, point: Vector4D) -> Vector3D:
        return (point - self.position).project_to_3d(self.viewer_distance)

    def project_3d_to_2d(self, point: Vector3D) -> Vector2D:
        projected = point.project_to_2d(self.screen_distance)
        return Vector2D(
            self.screen_center_x + projected.x * self.scale_x,
            self.screen_center_y - projected.y * self.scale_y,  # raster Y grows downwards
        )

    def project(self, point: Vector4D) -> Vector2D:
        return self.project_3d_to_2d(self.project_4d_to_3d(point))

    def project_points(self, points: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """
        Project an (N, 4) array straight to (N, 2) screen pixels.

        Applies the same epsilon fallbacks as the scalar path: rows whose
        denominator is too small collapse to zero before the next stage.
        """
        rel = np.asarray(points, dtype=np.float64).reshape(-1, 4) - self.position.to_array()

        denom_w = rel[:, 3] + self.viewer_distance
        ok_w = denom_w >= config.PROJECTION_EPSILON
        factor_w = np.where(ok_w, self.viewer_distance / np.where(ok_w, denom_w, 1.0), 0.0)
        p3 = rel[:, :3] * factor_w[:, None]

        denom_z = p3[:, 2] + self.screen_distance
        ok_z = denom_z >= config.PROJECTION_EPSILON
        factor_z = np.where(ok_z, self.screen_distance / np.where(ok_z, denom_z, 1.0), 0.0)
        p2 = p3[:, :2] * factor_z[:, None]

        return np.column_stack((
            self.screen_center_x + p2[:, 0] * self.scale_x,
            self.screen_center_y - p2[:, 1] * self.scale_y,
        ))

    # ---- mutation ----

    def move(self, direction: Vector4D) -> None:
        self.position = self.position + direction

    def move_along(self, axis: int, step: float = config.CAMERA_STEP) -> None:
        """Move along a single axis (0=X, 1=Y, 2=Z, 3=W)."""
        self.move(AXIS_VECTORS[axis] * step)

    def adjust_viewer_distance(self, delta: float) -> None:
        self.viewer_distance = max(config.MIN_DISTANCE, self.viewer_distance + delta)

    def adjust_screen_distance(self, delta: float) -> None:
        self.screen_distance = max(config.MIN_DISTANCE, self.screen_distance + delta)
