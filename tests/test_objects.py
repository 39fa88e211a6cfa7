import math

import numpy as np
import pytest

from hyperview.model.matrix import Matrix4D
from hyperview.model.objects import Object4D
from hyperview.model.shapes import PentachoronParams, TesseractParams, ToratopeParams
from hyperview.model.vectors import Vector4D


def test_new_object_working_equals_canonical():
    obj = Object4D(TesseractParams())
    assert obj.vertex_count == 16
    assert obj.edge_count == 32
    np.testing.assert_array_equal(obj.working_points, obj.canonical_points)
    assert obj.last_transform == Matrix4D.identity()
    assert obj.name == "Tesseract"


def test_centroid_is_mean_of_canonical_vertices():
    obj = Object4D(PentachoronParams())
    expected = np.mean(obj.canonical_points, axis=0)
    np.testing.assert_allclose(obj.centroid.to_array(), expected)


def test_offset_moves_canonical_pose_and_centroid():
    obj = Object4D(TesseractParams(), offset=Vector4D(2.0, 0.0, 0.0, 0.0))
    np.testing.assert_allclose(obj.centroid.to_array(), [2.0, 0.0, 0.0, 0.0], atol=1e-12)
    assert obj.canonical_points[:, 0].min() == pytest.approx(1.5)


def test_apply_transform_pivots_on_centroid():
    obj = Object4D(TesseractParams(), offset=Vector4D(3.0, -1.0, 0.5, 2.0))
    obj.apply_transform(Matrix4D.rotation_xw(0.8))
    np.testing.assert_allclose(obj.working_points.mean(axis=0), obj.centroid.to_array(), atol=1e-12)


def test_apply_transform_does_not_accumulate():
    obj = Object4D(TesseractParams())
    m = Matrix4D.rotation_xy(0.3)
    obj.apply_transform(m)
    once = np.array(obj.working_points)
    obj.apply_transform(m)
    np.testing.assert_array_equal(obj.working_points, once)
    assert obj.last_transform == m


def test_reset_restores_canonical_exactly():
    obj = Object4D(ToratopeParams(resolution=8))
    for angle in (0.1, 1.7, 2.9):
        obj.apply_transform(Matrix4D.rotation_zw(angle))
    obj.reset_transform()
    np.testing.assert_array_equal(obj.working_points, obj.canonical_points)
    assert obj.last_transform == Matrix4D.identity()


def test_canonical_pose_is_never_modified():
    obj = Object4D(TesseractParams())
    before = np.array(obj.canonical_points)
    obj.apply_transform(Matrix4D.rotation_yz(1.0))
    obj.apply_incremental(Matrix4D.rotation_yz(1.0))
    np.testing.assert_array_equal(obj.canonical_points, before)


def test_points_views_are_read_only():
    obj = Object4D(TesseractParams())
    with pytest.raises(ValueError):
        obj.working_points[0, 0] = 99.0


def test_incremental_rotations_compose():
    obj = Object4D(TesseractParams())
    for _ in range(4):
        obj.apply_incremental(Matrix4D.rotation_xy(math.pi / 8))
    expected = Object4D(TesseractParams())
    expected.apply_transform(Matrix4D.rotation_xy(math.pi / 2))
    np.testing.assert_allclose(obj.working_points, expected.working_points, atol=1e-12)
    assert obj.last_transform.allclose(Matrix4D.rotation_xy(math.pi / 2))


def test_regenerate_replaces_geometry_and_resets_pose():
    obj = Object4D(TesseractParams(size=1.0), offset=Vector4D(1.0, 0.0, 0.0, 0.0))
    obj.apply_transform(Matrix4D.rotation_xy(1.0))
    obj.regenerate(TesseractParams(size=2.0))
    assert obj.params == TesseractParams(size=2.0)
    np.testing.assert_array_equal(obj.working_points, obj.canonical_points)
    assert obj.canonical_points[:, 0].max() == pytest.approx(2.0)


def test_vertex_lists_match_arrays():
    obj = Object4D(PentachoronParams())
    assert len(obj.working_vertices) == 5
    assert obj.canonical_vertices[4] == Vector4D.from_array(obj.canonical_points[4])
