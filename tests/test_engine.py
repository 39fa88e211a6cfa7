import math

import numpy as np
import pytest

from hyperview import config
from hyperview.engine import Command, Engine, RotationMode, RotationState
from hyperview.model.matrix import Matrix4D, RotationPlane
from hyperview.model.objects import Object4D
from hyperview.model.scene import Scene
from hyperview.model.shapes import PentachoronParams, TesseractParams


@pytest.fixture
def engine():
    scene = Scene()
    scene.add(Object4D(TesseractParams()))
    scene.add(Object4D(PentachoronParams()))
    return Engine(800, 600, scene=scene)


def test_initial_state(engine):
    state = engine.rotation
    assert state.active_planes == [RotationPlane.XY]
    assert state.angles == [0.0] * 6
    assert state.animating
    assert state.mode == RotationMode.ABSOLUTE
    assert state.speed == config.ROTATION_SPEED


def test_default_engine_builds_demo_scene():
    assert len(Engine().scene) == 4


def test_update_advances_active_planes_only(engine):
    engine.handle_command(Command.TOGGLE_PLANE_6)
    engine.update(0.5)
    angles = engine.rotation.angles
    assert angles[RotationPlane.XY] == pytest.approx(0.25)
    assert angles[RotationPlane.ZW] == pytest.approx(0.25)
    assert angles[RotationPlane.XZ] == 0.0


def test_update_while_paused_does_nothing(engine):
    engine.handle_command(Command.TOGGLE_ANIMATE)
    engine.update(1.0)
    assert engine.rotation.angles[RotationPlane.XY] == 0.0
    obj = engine.scene.selected
    np.testing.assert_array_equal(obj.working_points, obj.canonical_points)


def test_angles_wrap_to_full_turn():
    state = RotationState(speed=1.0)
    state.advance(2 * math.pi + 0.5)
    assert state.angles[RotationPlane.XY] == pytest.approx(0.5)


def test_reset_mode_pose_depends_only_on_angle(engine):
    for _ in range(10):
        engine.update(0.1)
    obj = engine.scene.selected
    expected = Object4D(TesseractParams())
    expected.apply_transform(Matrix4D.rotation_xy(engine.rotation.angles[RotationPlane.XY]))
    np.testing.assert_allclose(obj.working_points, expected.working_points, atol=1e-12)


def test_only_selected_object_rotates(engine):
    engine.update(0.3)
    other = engine.scene.objects[1]
    np.testing.assert_array_equal(other.working_points, other.canonical_points)


def test_show_all_rotates_every_object(engine):
    engine.show_all = True
    engine.update(0.3)
    for obj in engine.scene:
        assert not np.array_equal(obj.working_points, obj.canonical_points)


def test_cumulative_mode_compounds(engine):
    engine.handle_command(Command.TOGGLE_RESET_MODE)
    assert engine.rotation.mode == RotationMode.CUMULATIVE
    engine.update(0.2)
    engine.update(0.2)
    # 0.1 rad then the absolute 0.2 rad on top of it
    expected = Object4D(TesseractParams())
    expected.apply_transform(Matrix4D.rotation_xy(0.3))
    np.testing.assert_allclose(engine.scene.selected.working_points, expected.working_points, atol=1e-12)


def test_switching_back_to_reset_mode_restores_pose(engine):
    engine.handle_command(Command.TOGGLE_RESET_MODE)
    engine.update(0.4)
    engine.handle_command(Command.TOGGLE_RESET_MODE)
    assert engine.rotation.mode == RotationMode.ABSOLUTE
    obj = engine.scene.selected
    np.testing.assert_array_equal(obj.working_points, obj.canonical_points)


def test_compose_uses_fixed_plane_order():
    state = RotationState(
        angles=[0.1, 0.2, 0.3, 0.4, 0.5, 0.6],
        active=[True, False, True, False, False, True],
    )
    expected = (
        Matrix4D.rotation_xy(0.1)
        .multiply(Matrix4D.rotation_xw(0.3))
        .multiply(Matrix4D.rotation_zw(0.6))
    )
    assert state.compose().allclose(expected)


def test_speed_is_clamped(engine):
    engine.handle_command(Command.SPEED_UP)
    assert engine.rotation.speed == pytest.approx(0.6)
    for _ in range(20):
        engine.handle_command(Command.SPEED_DOWN)
    assert engine.rotation.speed == config.MIN_ROTATION_SPEED


def test_release_events_are_ignored(engine):
    engine.handle_command(Command.TOGGLE_PLANE_1, pressed=False)
    engine.handle_command(Command.SPEED_UP, pressed=False)
    assert engine.rotation.active[RotationPlane.XY]
    assert engine.rotation.speed == config.ROTATION_SPEED


@pytest.mark.parametrize("command, axis, sign", [
    (Command.MOVE_CAMERA_POS_X, "x", 1), (Command.MOVE_CAMERA_NEG_X, "x", -1),
    (Command.MOVE_CAMERA_POS_Y, "y", 1), (Command.MOVE_CAMERA_NEG_Y, "y", -1),
    (Command.MOVE_CAMERA_POS_Z, "z", 1), (Command.MOVE_CAMERA_NEG_Z, "z", -1),
    (Command.MOVE_CAMERA_POS_W, "w", 1), (Command.MOVE_CAMERA_NEG_W, "w", -1),
])
def test_camera_commands(engine, command, axis, sign):
    before = getattr(engine.camera.position, axis)
    engine.handle_command(command)
    after = getattr(engine.camera.position, axis)
    assert after - before == pytest.approx(sign * config.CAMERA_STEP)


def test_viewer_distance_commands(engine):
    engine.handle_command(Command.VIEWER_DISTANCE_OUT)
    assert engine.camera.viewer_distance == pytest.approx(5.2)
    for _ in range(40):
        engine.handle_command(Command.VIEWER_DISTANCE_IN)
    assert engine.camera.viewer_distance == config.MIN_DISTANCE


def test_select_next_resets_previous_object(engine):
    engine.update(0.5)
    first = engine.scene.selected
    engine.select_next_object()
    assert engine.scene.selected is engine.scene.objects[1]
    np.testing.assert_array_equal(first.working_points, first.canonical_points)


def test_resize_updates_camera(engine):
    engine.resize(1000, 400)
    assert (engine.camera.screen_center_x, engine.camera.screen_center_y) == (500, 200)
    assert engine.camera.scale_x == pytest.approx(100.0)


def test_tick_draws_frame_with_overlay(engine, surface):
    engine.tick(0.016, surface)
    assert surface.calls[0] == ("clear", (config.BACKGROUND_COLOR,))
    assert len(surface.of("line")) == 32
    assert "Active Rotations: XY" in surface.texts
    assert "Mode: Reset Each Frame" in surface.texts
    assert "Object: Tesseract" in surface.texts
    assert any(t.startswith("Controls:") for t in surface.texts)


def test_status_lines_reflect_state(engine):
    engine.handle_command(Command.TOGGLE_PLANE_3)
    engine.handle_command(Command.TOGGLE_ANIMATE)
    lines = engine.status_lines()
    assert "Active Rotations: XY XW" in lines
    assert "Animation: Paused" in lines
    assert "Vertices: 16, Edges: 32" in lines
