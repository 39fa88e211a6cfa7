"""
Shape Catalog (4D Polytopes and Manifolds)
==========================================
This module synthesizes vertex/edge topology for the canonical 4D solids.

Why is this file needed?
------------------------
1. Closed set of shapes: every shape kind has its own frozen parameter
   dataclass, and `generate()` dispatches on it with `match`.
2. Purity: generators are plain functions of their parameters. They return a
   `Geometry` and know nothing about poses, cameras or drawing.

Classes:
    ShapeKind: Enum of the supported shapes.
    TesseractParams, PentachoronParams, HypersphereParams, ToratopeParams:
        Parameter sets, validated on construction.
    Geometry: Generated vertices (N, 4) and edges.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar, Optional, Union, TYPE_CHECKING
import itertools
import logging
import math

import numpy as np

from hyperview.model import colors
from hyperview.model.edges import Edge
from hyperview.model.matrix import RotationPlane

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

MIN_HYPERSPHERE_RESOLUTION = 4
MIN_TORATOPE_RESOLUTION = 8


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class ShapeKind(StrEnum):
    TESSERACT = "tesseract"
    PENTACHORON = "pentachoron"
    HYPERSPHERE = "hypersphere"
    TORATOPE = "toratope"

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]


DISPLAY_NAMES: dict[ShapeKind, str] = {
    ShapeKind.TESSERACT: "Tesseract",
    ShapeKind.PENTACHORON: "5-Cell (Pentachoron)",
    ShapeKind.HYPERSPHERE: "Hypersphere",
    ShapeKind.TORATOPE: "Toratope",
}


# ------------------------------------------------------------------------------
# Parameter sets
# ------------------------------------------------------------------------------
def _require_positive(name: str, value: float) -> None:
    if not value > 0.0:
        raise ValueError(f"'{name}' must be positive, got {value}.")


def _require_at_least(name: str, value: int, minimum: int) -> None:
    if value < minimum:
        raise ValueError(f"'{name}' must be at least {minimum}, got {value}.")


@dataclass(frozen=True)
class TesseractParams:
    KIND: ClassVar[ShapeKind] = ShapeKind.TESSERACT
    size: float = 1.0

    def __post_init__(self) -> None:
        _require_positive("size", self.size)


@dataclass(frozen=True)
class PentachoronParams:
    KIND: ClassVar[ShapeKind] = ShapeKind.PENTACHORON
    size: float = 1.0  # edge length

    def __post_init__(self) -> None:
        _require_positive("size", self.size)


@dataclass(frozen=True)
class HypersphereParams:
    """
    Sampling controls for the hypersphere wireframe.

    `separation` and `connection` are fractions of the radius. A candidate
    point closer than ``separation * radius`` to an accepted point is
    dropped; vertices closer than the connection distance are linked, at most
    `max_neighbors` per vertex. When `connection` is None it is derived from
    the great-circle spacing so neighbouring circle samples always connect,
    and never drops below twice the separation.
    """
    KIND: ClassVar[ShapeKind] = ShapeKind.HYPERSPHERE
    radius: float = 1.0
    resolution: int = 12
    separation: float = 0.2
    connection: Optional[float] = None
    max_neighbors: int = 4

    def __post_init__(self) -> None:
        _require_positive("radius", self.radius)
        _require_at_least("resolution", self.resolution, MIN_HYPERSPHERE_RESOLUTION)
        _require_positive("separation", self.separation)
        if self.connection is not None:
            _require_positive("connection", self.connection)
        _require_at_least("max_neighbors", self.max_neighbors, 1)

    @property
    def connection_distance(self) -> float:
        if self.connection is not None:
            return self.connection * self.radius
        chord = 2.0 * math.sin(math.pi / self.resolution)
        return max(1.1 * chord, 2.0 * self.separation) * self.radius


@dataclass(frozen=True)
class ToratopeParams:
    """
    A 4D torus swept by three angles.

    theta1 runs `resolution` steps around the major circle, theta2 runs
    `resolution` steps around the tube and theta3 runs `w_steps` steps
    lifting the tube into W.
    """
    KIND: ClassVar[ShapeKind] = ShapeKind.TORATOPE
    major_radius: float = 1.5
    minor_radius: float = 0.5
    resolution: int = 12
    w_steps: int = 6

    def __post_init__(self) -> None:
        _require_positive("major_radius", self.major_radius)
        _require_positive("minor_radius", self.minor_radius)
        _require_at_least("resolution", self.resolution, MIN_TORATOPE_RESOLUTION)
        _require_at_least("w_steps", self.w_steps, 3)


# Union for type hinting
ShapeParams = Union[TesseractParams, PentachoronParams, HypersphereParams, ToratopeParams]

DEFAULT_PARAMS: dict[ShapeKind, ShapeParams] = {
    ShapeKind.TESSERACT: TesseractParams(),
    ShapeKind.PENTACHORON: PentachoronParams(),
    ShapeKind.HYPERSPHERE: HypersphereParams(),
    ShapeKind.TORATOPE: ToratopeParams(),
}


# ------------------------------------------------------------------------------
# Generated data
# ------------------------------------------------------------------------------
@dataclass
class Geometry:
    """Vertices as an (N, 4) array plus edges indexing into it."""
    vertices: npt.NDArray[np.float64]
    edges: list[Edge] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def edge_count(self) -> int:
        return len(self.edges)


def generate(params: ShapeParams) -> Geometry:
    """
    Build the canonical geometry for a parameter set.

    Raises:
        TypeError: If `params` is not one of the known parameter classes.
    """
    match params:
        case TesseractParams(size=size):
            geometry = _tesseract(size)
        case PentachoronParams(size=size):
            geometry = _pentachoron(size)
        case HypersphereParams():
            geometry = _hypersphere(params)
        case ToratopeParams():
            geometry = _toratope(params)
        case _:
            raise TypeError(f"Unsupported shape parameters: {type(params).__name__}")

    logger.debug(
        f"Generated {params.KIND.display_name}: "
        f"{geometry.vertex_count} vertices, {geometry.edge_count} edges"
    )
    return geometry


# ------------------------------------------------------------------------------
# Tesseract
# ------------------------------------------------------------------------------
TESSERACT_AXIS_COLORS: dict[int, colors.Color] = {
    1: colors.RED,      # X
    2: colors.GREEN,    # Y
    4: colors.BLUE,     # Z
    8: colors.YELLOW,   # W
}


def _tesseract(size: float) -> Geometry:
    """
    16 sign combinations of ``±size/2``. Bit k of the vertex index selects the
    sign on axis k, so two vertices share an edge iff their indices differ in
    exactly one bit.
    """
    half = size / 2
    vertices = np.array(
        [[half if i & (1 << axis) else -half for axis in range(4)] for i in range(16)],
        dtype=np.float64
    )

    edges = []
    for i, j in itertools.combinations(range(16), 2):
        diff = i ^ j
        if diff & (diff - 1) == 0:  # single bit set
            edges.append(Edge(i, j, TESSERACT_AXIS_COLORS[diff]))

    return Geometry(vertices, edges)


# ------------------------------------------------------------------------------
# Pentachoron
# ------------------------------------------------------------------------------
def _pentachoron(size: float) -> Geometry:
    """
    Regular 4-simplex with edge length `size`.

    Four vertices form a tetrahedron at ``w = -b`` and the apex sits at
    ``w = 4b``; with ``b = a / sqrt(5)`` every edge has length ``2*sqrt(2)*a``.
    """
    a = size / (2.0 * math.sqrt(2.0))
    b = a / math.sqrt(5.0)
    vertices = np.array([
        [a, a, a, -b],
        [-a, -a, a, -b],
        [-a, a, -a, -b],
        [a, -a, -a, -b],
        [0.0, 0.0, 0.0, 4.0 * b],
    ], dtype=np.float64)

    edges = [
        Edge(i, j, colors.SOFT_PALETTE[i])
        for i, j in itertools.combinations(range(len(vertices)), 2)
    ]
    return Geometry(vertices, edges)


# ------------------------------------------------------------------------------
# Toratope
# ------------------------------------------------------------------------------
TORATOPE_FAMILY_COLORS: tuple[colors.Color, colors.Color, colors.Color] = (
    colors.SOFT_RED,    # major circle
    colors.SOFT_GREEN,  # tube circle
    colors.SOFT_BLUE,   # W circle
)


def _toratope(params: ToratopeParams) -> Geometry:
    big_r, small_r = params.major_radius, params.minor_radius
    n1 = n2 = params.resolution
    n3 = params.w_steps

    theta1 = 2.0 * np.pi * np.arange(n1) / n1
    theta2 = 2.0 * np.pi * np.arange(n2) / n2
    theta3 = 2.0 * np.pi * np.arange(n3) / n3

    # index order (i, j, k) -> (i * n2 + j) * n3 + k
    t1, t2, t3 = np.meshgrid(theta1, theta2, theta3, indexing="ij")
    ring = big_r + small_r * np.cos(t2) * np.cos(t3)
    vertices = np.stack([
        ring * np.cos(t1),
        ring * np.sin(t1),
        small_r * np.sin(t2) * np.cos(t3),
        small_r * np.sin(t3),
    ], axis=-1).reshape(-1, 4)

    def index(i: int, j: int, k: int) -> int:
        return (i * n2 + j) * n3 + k

    edges = []
    for i, j, k in itertools.product(range(n1), range(n2), range(n3)):
        current = index(i, j, k)
        edges.append(Edge(current, index((i + 1) % n1, j, k), TORATOPE_FAMILY_COLORS[0]))
        edges.append(Edge(current, index(i, (j + 1) % n2, k), TORATOPE_FAMILY_COLORS[1]))
        edges.append(Edge(current, index(i, j, (k + 1) % n3), TORATOPE_FAMILY_COLORS[2]))

    return Geometry(vertices, edges)


# ------------------------------------------------------------------------------
# Hypersphere
# ------------------------------------------------------------------------------
def _hypersphere(params: HypersphereParams) -> Geometry:
    """
    Wireframe approximation of the 3-sphere.

    Candidates come from three sources, in order: the 8 poles on the axes,
    `resolution` samples on each of the six coordinate great circles, then a
    4D spherical-coordinate grid. Each candidate survives only if it keeps
    the minimum separation to every accepted point. Edges join each vertex to
    its nearest neighbours within the connection distance.
    """
    r = params.radius
    candidates = np.vstack([
        _hypersphere_poles(r),
        _hypersphere_great_circles(r, params.resolution),
        _hypersphere_spherical_grid(r, params.resolution),
    ])
    vertices = _deduplicate(candidates, params.separation * r)
    edges = _proximity_edges(vertices, params.connection_distance, params.max_neighbors, r)
    return Geometry(vertices, edges)


def _hypersphere_poles(r: float) -> npt.NDArray[np.float64]:
    eye = np.identity(4, dtype=np.float64)
    return np.vstack([eye * r, eye * -r])


def _hypersphere_great_circles(r: float, resolution: int) -> npt.NDArray[np.float64]:
    phi = 2.0 * np.pi * np.arange(resolution) / resolution
    circles = []
    for plane in RotationPlane:
        i, j = plane.axes
        pts = np.zeros((resolution, 4), dtype=np.float64)
        pts[:, i] = r * np.cos(phi)
        pts[:, j] = r * np.sin(phi)
        circles.append(pts)
    return np.vstack(circles)


def _hypersphere_spherical_grid(r: float, resolution: int) -> npt.NDArray[np.float64]:
    steps = resolution // 2
    theta1 = np.pi * np.arange(steps) / steps
    theta2 = np.pi * np.arange(steps) / steps
    theta3 = 2.0 * np.pi * np.arange(steps) / steps
    t1, t2, t3 = np.meshgrid(theta1, theta2, theta3, indexing="ij")
    return np.stack([
        r * np.sin(t1) * np.sin(t2) * np.cos(t3),
        r * np.sin(t1) * np.sin(t2) * np.sin(t3),
        r * np.sin(t1) * np.cos(t2),
        r * np.cos(t1),
    ], axis=-1).reshape(-1, 4)


def _deduplicate(candidates: npt.NDArray[np.float64], min_distance: float) -> npt.NDArray[np.float64]:
    """Greedy minimum-distance filter; earlier candidates win."""
    accepted: list[npt.NDArray[np.float64]] = []
    for point in candidates:
        if accepted and np.min(np.linalg.norm(np.asarray(accepted) - point, axis=1)) < min_distance:
            continue
        accepted.append(point)
    return np.asarray(accepted, dtype=np.float64).reshape(-1, 4)


def _proximity_edges(
    vertices: npt.NDArray[np.float64],
    max_distance: float,
    max_neighbors: int,
    radius: float,
) -> list[Edge]:
    """
    Link each vertex to its nearest neighbours within `max_distance`.

    Neighbours are ranked by ascending distance, ties by ascending index,
    and the first `max_neighbors` are kept. A vertex with nothing in range is
    linked to its single nearest vertex instead, so no vertex is left
    isolated. An edge chosen from either end is emitted once, as (low, high),
    in first-seen order.
    """
    n = vertices.shape[0]
    distances = np.linalg.norm(vertices[:, None, :] - vertices[None, :, :], axis=-1)

    seen: set[tuple[int, int]] = set()
    edges: list[Edge] = []
    for i in range(n):
        candidates = [j for j in range(n) if j != i and distances[i, j] < max_distance]
        candidates.sort(key=lambda j: (distances[i, j], j))
        if not candidates and n > 1:
            others = [j for j in range(n) if j != i]
            candidates = [min(others, key=lambda j: (distances[i, j], j))]
        for j in candidates[:max_neighbors]:
            key = (min(i, j), max(i, j))
            if key in seen:
                continue
            seen.add(key)
            mid_w = 0.5 * (vertices[i, 3] + vertices[j, 3])
            edges.append(Edge(key[0], key[1], colors.gradient(0.5 * (mid_w / radius + 1.0))))
    return edges
