"""
Vector value types for 2D, 3D and 4D space.

All vectors are frozen dataclasses: arithmetic always returns a new
instance and never mutates an operand.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, TYPE_CHECKING
import math

import numpy as np

from hyperview.config import EPSILON, PROJECTION_EPSILON

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector2D:
    """A point or direction on the screen plane."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2D) -> Vector2D:
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2D:
        return Vector2D(-self.x, -self.y)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)

    def normalize(self) -> Vector2D:
        mag = self.magnitude
        if mag < EPSILON: return Vector2D()
        return Vector2D(self.x / mag, self.y / mag)

    def offset(self, dx: float = 0.0, dy: float = 0.0) -> Vector2D:
        """Shift by a pixel amount, e.g. to place a label next to a vertex."""
        return Vector2D(self.x + dx, self.y + dy)

    def to_point(self) -> tuple[int, int]:
        """Nearest integer pixel coordinate."""
        return round(self.x), round(self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class Vector3D:
    """A vector in the intermediate 3D projection space."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3D) -> Vector3D:
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3D:
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3D:
        return Vector3D(-self.x, -self.y, -self.z)

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector3D:
        mag = self.magnitude
        if mag < EPSILON: return Vector3D()
        return Vector3D(self.x / mag, self.y / mag, self.z / mag)

    def project_to_2d(self, distance: float) -> Vector2D:
        """
        Perspective divide along Z.

        Points on or behind the projection plane (z + distance below epsilon)
        collapse to the origin instead of inverting.
        """
        denominator = self.z + distance
        if denominator < PROJECTION_EPSILON:
            return Vector2D()
        factor = distance / denominator
        return Vector2D(self.x * factor, self.y * factor)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])


@dataclass(frozen=True)
class Vector4D:
    """A point or direction in 4D space."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def from_array(cls, values: Iterable[float]) -> Vector4D:
        x, y, z, w = (float(v) for v in values)
        return cls(x, y, z, w)

    def __add__(self, other: Vector4D) -> Vector4D:
        return Vector4D(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vector4D) -> Vector4D:
        return Vector4D(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: float) -> Vector4D:
        return Vector4D(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector4D:
        return Vector4D(-self.x, -self.y, -self.z, -self.w)

    def dot(self, other: Vector4D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def normalize(self) -> Vector4D:
        mag = self.magnitude
        if mag < EPSILON: return Vector4D()
        return self * (1.0 / mag)

    def distance_to(self, other: Vector4D) -> float:
        return (self - other).magnitude

    def project_to_3d(self, distance: float) -> Vector3D:
        """
        Perspective divide along W.

        X, Y and Z are scaled by ``distance / (w + distance)``. A denominator
        below epsilon (the point sits on or behind the viewer's W-plane)
        yields the zero vector.
        """
        denominator = self.w + distance
        if denominator < PROJECTION_EPSILON:
            return Vector3D()
        factor = distance / denominator
        return Vector3D(self.x * factor, self.y * factor, self.z * factor)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z, self.w])
