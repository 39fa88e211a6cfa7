import itertools
import math

import numpy as np
import pytest

from hyperview.model import colors
from hyperview.model.shapes import (
    DEFAULT_PARAMS, HypersphereParams, PentachoronParams, ShapeKind,
    TesseractParams, ToratopeParams, generate,
)


def edge_lengths(geometry):
    v = geometry.vertices
    return np.array([np.linalg.norm(v[e.start] - v[e.end]) for e in geometry.edges])


def degrees(geometry):
    counts = np.zeros(geometry.vertex_count, dtype=int)
    for e in geometry.edges:
        counts[e.start] += 1
        counts[e.end] += 1
    return counts


# ------------------------------------------------------------------------------
# Tesseract
# ------------------------------------------------------------------------------
def test_tesseract_counts_and_degree():
    g = generate(TesseractParams(size=1.0))
    assert g.vertex_count == 16
    assert g.edge_count == 32
    assert (degrees(g) == 4).all()


def test_tesseract_vertices_and_edge_lengths():
    g = generate(TesseractParams(size=2.0))
    np.testing.assert_allclose(np.abs(g.vertices), 1.0)
    np.testing.assert_allclose(edge_lengths(g), 2.0)
    assert len({tuple(row) for row in g.vertices}) == 16


def test_tesseract_edges_colored_by_axis():
    g = generate(TesseractParams())
    for e in g.edges:
        diff = e.start ^ e.end
        assert bin(diff).count("1") == 1
        axis = diff.bit_length() - 1
        assert e.color == (colors.RED, colors.GREEN, colors.BLUE, colors.YELLOW)[axis]


# ------------------------------------------------------------------------------
# Pentachoron
# ------------------------------------------------------------------------------
@pytest.mark.parametrize("size", [1.0, 2.5])
def test_pentachoron_is_regular(size):
    g = generate(PentachoronParams(size=size))
    assert g.vertex_count == 5
    assert g.edge_count == 10
    np.testing.assert_allclose(edge_lengths(g), size)


def test_pentachoron_is_complete_graph():
    g = generate(PentachoronParams())
    pairs = {(e.start, e.end) for e in g.edges}
    assert pairs == set(itertools.combinations(range(5), 2))


# ------------------------------------------------------------------------------
# Toratope
# ------------------------------------------------------------------------------
def test_toratope_counts():
    g = generate(ToratopeParams(major_radius=1.5, minor_radius=0.5, resolution=12))
    assert g.vertex_count == 12 * 12 * 6
    assert g.edge_count == 3 * g.vertex_count
    assert (degrees(g) == 6).all()


def test_toratope_vertex_formula():
    p = ToratopeParams(major_radius=2.0, minor_radius=0.5, resolution=8, w_steps=4)
    g = generate(p)
    i, j, k = 1, 2, 3
    t1, t2, t3 = 2 * math.pi * i / 8, 2 * math.pi * j / 8, 2 * math.pi * k / 4
    ring = 2.0 + 0.5 * math.cos(t2) * math.cos(t3)
    expected = [ring * math.cos(t1), ring * math.sin(t1), 0.5 * math.sin(t2) * math.cos(t3), 0.5 * math.sin(t3)]
    np.testing.assert_allclose(g.vertices[(i * 8 + j) * 4 + k], expected, atol=1e-12)


# ------------------------------------------------------------------------------
# Hypersphere
# ------------------------------------------------------------------------------
@pytest.fixture(scope="module")
def hypersphere_params():
    return HypersphereParams(radius=0.7, resolution=8)


def test_hypersphere_vertices_on_sphere(hypersphere_params):
    g = generate(hypersphere_params)
    np.testing.assert_allclose(np.linalg.norm(g.vertices, axis=1), 0.7)


def test_hypersphere_includes_poles(hypersphere_params):
    g = generate(hypersphere_params)
    np.testing.assert_allclose(g.vertices[:8], np.vstack([np.eye(4) * 0.7, np.eye(4) * -0.7]))


def test_hypersphere_minimum_separation(hypersphere_params):
    g = generate(hypersphere_params)
    d = np.linalg.norm(g.vertices[:, None] - g.vertices[None, :], axis=-1)
    np.fill_diagonal(d, np.inf)
    assert d.min() >= hypersphere_params.separation * hypersphere_params.radius


def test_hypersphere_edges_are_short_and_unique(hypersphere_params):
    g = generate(hypersphere_params)
    assert g.edge_count > 0
    d = np.linalg.norm(g.vertices[:, None] - g.vertices[None, :], axis=-1)
    np.fill_diagonal(d, np.inf)
    nearest = d.min(axis=1)
    for e, length in zip(g.edges, edge_lengths(g)):
        # longer links only join a vertex that had nothing in range to its nearest vertex
        assert (
            length < hypersphere_params.connection_distance
            or length == pytest.approx(nearest[e.start])
            or length == pytest.approx(nearest[e.end])
        )
    keys = [(e.start, e.end) for e in g.edges]
    assert all(a < b for a, b in keys)
    assert len(keys) == len(set(keys))


def test_hypersphere_is_deterministic(hypersphere_params):
    a = generate(hypersphere_params)
    b = generate(hypersphere_params)
    np.testing.assert_array_equal(a.vertices, b.vertices)
    assert a.edges == b.edges


@pytest.mark.parametrize("resolution", [8, 12, 16, 20, 24, 28, 32])
@pytest.mark.parametrize("radius", [0.7, 1.0])
def test_hypersphere_has_no_isolated_vertices(resolution, radius):
    g = generate(HypersphereParams(radius=radius, resolution=resolution))
    assert (degrees(g) > 0).all()


def test_hypersphere_link_distance_stays_above_separation():
    for resolution in range(4, 65):
        p = HypersphereParams(resolution=resolution)
        assert p.connection_distance >= 2.0 * p.separation * p.radius


def test_hypersphere_explicit_connection_distance():
    p = HypersphereParams(radius=2.0, resolution=8, connection=0.5)
    assert p.connection_distance == pytest.approx(1.0)


# ------------------------------------------------------------------------------
# Validation and dispatch
# ------------------------------------------------------------------------------
@pytest.mark.parametrize("factory", [
    lambda: TesseractParams(size=0.0),
    lambda: PentachoronParams(size=-1.0),
    lambda: HypersphereParams(radius=0.0),
    lambda: HypersphereParams(resolution=3),
    lambda: ToratopeParams(minor_radius=-0.1),
    lambda: ToratopeParams(resolution=7),
    lambda: ToratopeParams(w_steps=2),
])
def test_invalid_parameters_raise(factory):
    with pytest.raises(ValueError):
        factory()


def test_unknown_params_type_raises():
    with pytest.raises(TypeError):
        generate(object())


def test_default_params_cover_every_kind():
    assert set(DEFAULT_PARAMS) == set(ShapeKind)
    for kind, params in DEFAULT_PARAMS.items():
        assert params.KIND is kind
        assert generate(params).vertex_count > 0
