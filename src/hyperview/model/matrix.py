"""
Homogeneous 5x5 matrices for affine maps in 4D.

Rows/columns 0-3 hold the linear part, column 4 holds the translation and
row 4 is the homogeneous row ``[0, 0, 0, 0, 1]``.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Optional, TYPE_CHECKING
import math

import numpy as np

from hyperview.model.vectors import Vector4D

if TYPE_CHECKING:
    import numpy.typing as npt

SIZE = 5


class RotationPlane(IntEnum):
    """The six coordinate planes of 4D space, in composition order."""
    XY = 0
    XZ = 1
    XW = 2
    YZ = 3
    YW = 4
    ZW = 5

    @property
    def axes(self) -> tuple[int, int]:
        """Indices of the two axes spanning the plane."""
        return _PLANE_AXES[self]

    @property
    def label(self) -> str:
        return self.name


_PLANE_AXES: dict[RotationPlane, tuple[int, int]] = {
    RotationPlane.XY: (0, 1),
    RotationPlane.XZ: (0, 2),
    RotationPlane.XW: (0, 3),
    RotationPlane.YZ: (1, 2),
    RotationPlane.YW: (1, 3),
    RotationPlane.ZW: (2, 3),
}


class Matrix4D:
    """
    A 4D affine transform in homogeneous form.

    Instances are treated as values: ``multiply`` and the constructors always
    return new matrices.
    """
    def __init__(self, values: Optional[Iterable[Iterable[float]] | npt.NDArray[np.float64]] = None) -> None:
        """
        Args:
            values: Optional 5x5 nested sequence or array. Identity if omitted.

        Raises:
            ValueError: If `values` is not 5x5.
        """
        if values is None:
            self._m = np.identity(SIZE, dtype=np.float64)
            return

        arr = np.array(values, dtype=np.float64)
        if arr.shape != (SIZE, SIZE):
            raise ValueError(f"Matrix must be {SIZE}x{SIZE}, got shape {arr.shape}.")
        self._m = arr

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._m.tolist()})"

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._m[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4D):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __mul__(self, other: Matrix4D) -> Matrix4D:
        return self.multiply(other)

    __matmul__ = __mul__

    @property
    def values(self) -> npt.NDArray[np.float64]:
        """A copy of the underlying 5x5 array."""
        return self._m.copy()

    # ---- constructors ----

    @classmethod
    def identity(cls) -> Matrix4D:
        return cls()

    @classmethod
    def rotation(cls, plane: RotationPlane, angle: float) -> Matrix4D:
        """
        Pure rotation in one coordinate plane.

        The 2x2 block ``[[cos, -sin], [sin, cos]]`` is embedded in the rows and
        columns of the plane's two axes.
        """
        i, j = RotationPlane(plane).axes
        m = np.identity(SIZE, dtype=np.float64)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        m[i, i] = cos_a
        m[i, j] = -sin_a
        m[j, i] = sin_a
        m[j, j] = cos_a
        return cls(m)

    @classmethod
    def rotation_xy(cls, angle: float) -> Matrix4D:
        return cls.rotation(RotationPlane.XY, angle)

    @classmethod
    def rotation_xz(cls, angle: float) -> Matrix4D:
        return cls.rotation(RotationPlane.XZ, angle)

    @classmethod
    def rotation_xw(cls, angle: float) -> Matrix4D:
        return cls.rotation(RotationPlane.XW, angle)

    @classmethod
    def rotation_yz(cls, angle: float) -> Matrix4D:
        return cls.rotation(RotationPlane.YZ, angle)

    @classmethod
    def rotation_yw(cls, angle: float) -> Matrix4D:
        return cls.rotation(RotationPlane.YW, angle)

    @classmethod
    def rotation_zw(cls, angle: float) -> Matrix4D:
        return cls.rotation(RotationPlane.ZW, angle)

    @classmethod
    def translation(cls, offset: Vector4D) -> Matrix4D:
        m = np.identity(SIZE, dtype=np.float64)
        m[:4, 4] = offset.to_array()
        return cls(m)

    @classmethod
    def scaling(cls, sx: float, sy: float, sz: float, sw: float) -> Matrix4D:
        return cls(np.diag([sx, sy, sz, sw, 1.0]))

    # ---- operations ----

    def multiply(self, other: Matrix4D) -> Matrix4D:
        """Standard matrix product ``self @ other`` (applies `other` first)."""
        return Matrix4D(self._m @ other._m)

    def transform(self, vector: Vector4D) -> Vector4D:
        """Apply the linear part plus the translation column to a point."""
        return Vector4D.from_array(self._m[:4, :4] @ vector.to_array() + self._m[:4, 4])

    def transform_points(self, points: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        """
        Transform an (N, 4) array of points.

        Equivalent to calling `transform` on every row.
        """
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 4)
        return pts @ self._m[:4, :4].T + self._m[:4, 4]

    def allclose(self, other: Matrix4D, atol: float = 1e-9) -> bool:
        return bool(np.allclose(self._m, other._m, atol=atol))
