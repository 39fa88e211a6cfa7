"""
Rotation Engine
===============
Owns the scene, the camera and the animation state, and advances them one
frame at a time.

Why is this file needed?
------------------------
1. Determinism: elapsed time is passed in by the caller (`update`/`tick`);
   the engine never reads a clock, so identical inputs give identical frames.
2. Control surface: the closed `Command` set is the only way the front-end
   changes rotation, camera and projection state.

Classes:
    RotationMode: Absolute (reset each frame) or cumulative rotation.
    Command: Abstract input commands.
    RotationState: Six plane angles, their active flags, speed and mode.
    Engine: Per-frame update, rotation composition and rendering dispatch.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
import math
from typing import Optional, TYPE_CHECKING

from hyperview import config
from hyperview.model.matrix import Matrix4D, RotationPlane
from hyperview.model.scene import Scene, create_demo_scene
from hyperview.model.vectors import Vector2D
from hyperview.rendering.camera import Camera4D
from hyperview.rendering.renderer import Renderer

if TYPE_CHECKING:
    from hyperview.rendering.surface import DrawingSurface

logger = logging.getLogger(__name__)

TAU = 2.0 * math.pi


class RotationMode(StrEnum):
    ABSOLUTE = "Reset Each Frame"
    # Re-applies the absolute-angle matrix onto last frame's pose. The
    # apparent speed keeps growing and rounding error accumulates.
    CUMULATIVE = "Cumulative Rotations"


class Command(StrEnum):
    TOGGLE_PLANE_1 = "toggle-plane-1"
    TOGGLE_PLANE_2 = "toggle-plane-2"
    TOGGLE_PLANE_3 = "toggle-plane-3"
    TOGGLE_PLANE_4 = "toggle-plane-4"
    TOGGLE_PLANE_5 = "toggle-plane-5"
    TOGGLE_PLANE_6 = "toggle-plane-6"
    TOGGLE_ANIMATE = "toggle-animate"
    TOGGLE_RESET_MODE = "toggle-reset-mode"
    SPEED_UP = "speed-up"
    SPEED_DOWN = "speed-down"
    MOVE_CAMERA_POS_X = "move-camera-+x"
    MOVE_CAMERA_NEG_X = "move-camera--x"
    MOVE_CAMERA_POS_Y = "move-camera-+y"
    MOVE_CAMERA_NEG_Y = "move-camera--y"
    MOVE_CAMERA_POS_Z = "move-camera-+z"
    MOVE_CAMERA_NEG_Z = "move-camera--z"
    MOVE_CAMERA_POS_W = "move-camera-+w"
    MOVE_CAMERA_NEG_W = "move-camera--w"
    VIEWER_DISTANCE_IN = "viewer-distance-in"
    VIEWER_DISTANCE_OUT = "viewer-distance-out"


PLANE_COMMANDS: dict[Command, RotationPlane] = {
    Command.TOGGLE_PLANE_1: RotationPlane.XY,
    Command.TOGGLE_PLANE_2: RotationPlane.XZ,
    Command.TOGGLE_PLANE_3: RotationPlane.XW,
    Command.TOGGLE_PLANE_4: RotationPlane.YZ,
    Command.TOGGLE_PLANE_5: RotationPlane.YW,
    Command.TOGGLE_PLANE_6: RotationPlane.ZW,
}

# (axis, sign)
CAMERA_COMMANDS: dict[Command, tuple[int, float]] = {
    Command.MOVE_CAMERA_POS_X: (0, 1.0),
    Command.MOVE_CAMERA_NEG_X: (0, -1.0),
    Command.MOVE_CAMERA_POS_Y: (1, 1.0),
    Command.MOVE_CAMERA_NEG_Y: (1, -1.0),
    Command.MOVE_CAMERA_POS_Z: (2, 1.0),
    Command.MOVE_CAMERA_NEG_Z: (2, -1.0),
    Command.MOVE_CAMERA_POS_W: (3, 1.0),
    Command.MOVE_CAMERA_NEG_W: (3, -1.0),
}

HELP_LINES = (
    "Controls: 1-6=Toggle Rotations, Space=Pause, T=Toggle Reset Mode, Tab=Next Object",
    "W/S/A/D/Q/E/R/F=Move Camera, +/-=Viewer Distance, Up/Down=Speed",
)


@dataclass
class RotationState:
    """Angles (radians) and active flags for the six planes, in `RotationPlane` order."""
    angles: list[float] = field(default_factory=lambda: [0.0] * len(RotationPlane))
    active: list[bool] = field(default_factory=lambda: [True] + [False] * (len(RotationPlane) - 1))
    speed: float = config.ROTATION_SPEED
    animating: bool = True
    mode: RotationMode = RotationMode.ABSOLUTE

    @property
    def reset_each_frame(self) -> bool:
        return self.mode == RotationMode.ABSOLUTE

    @property
    def active_planes(self) -> list[RotationPlane]:
        return [plane for plane in RotationPlane if self.active[plane]]

    def advance(self, delta_time: float) -> None:
        """Move every active plane forward by ``speed * delta_time``, wrapped to [0, 2pi)."""
        for plane in self.active_planes:
            self.angles[plane] = (self.angles[plane] + self.speed * delta_time) % TAU

    def compose(self) -> Matrix4D:
        """Product of the active planes' rotations in the fixed order XY, XZ, XW, YZ, YW, ZW."""
        rotation = Matrix4D.identity()
        for plane in self.active_planes:
            rotation = rotation.multiply(Matrix4D.rotation(plane, self.angles[plane]))
        return rotation


class Engine:
    def __init__(
        self,
        width: int = config.WINDOW_WIDTH,
        height: int = config.WINDOW_HEIGHT,
        scene: Optional[Scene] = None,
        camera: Optional[Camera4D] = None,
    ) -> None:
        self.camera = camera or Camera4D()
        self.camera.set_screen_parameters(width, height)
        self.scene = scene if scene is not None else create_demo_scene()
        self.renderer = Renderer(self.camera)
        self.rotation = RotationState()

        # Rotate and draw only the selected object unless set
        self.show_all: bool = False

        self.width = width
        self.height = height

    # ---- frame ----

    def tick(self, delta_time: float, surface: DrawingSurface) -> None:
        """One frame: advance state, then draw it."""
        self.update(delta_time)
        self.render(surface)

    def update(self, delta_time: float) -> None:
        if self.rotation.animating:
            self.rotation.advance(delta_time)
            self.rotate_objects()

    def rotate_objects(self) -> None:
        """Apply the current composed rotation to the target objects."""
        matrix = self.rotation.compose()
        for obj in self.scene.targets(self.show_all):
            if self.rotation.reset_each_frame:
                obj.reset_transform()
                obj.apply_transform(matrix)
            else:
                obj.apply_incremental(matrix)

    def render(self, surface: DrawingSurface) -> None:
        surface.clear(config.BACKGROUND_COLOR)
        self.renderer.render_scene(surface, self.scene, render_all=self.show_all)
        self.renderer.draw_overlay(surface, self.status_lines(), Vector2D(10, 10))
        self.renderer.draw_overlay(
            surface, HELP_LINES, Vector2D(10, surface.height - 40), color=config.HELP_COLOR
        )

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.camera.set_screen_parameters(width, height)
        logger.info(f"Viewport resized to {width}x{height}")

    # ---- commands ----

    def handle_command(self, command: Command, pressed: bool = True) -> None:
        """Dispatch an abstract input command. Releases are ignored."""
        if not pressed:
            return
        logger.debug(f"Command: {command}")

        if command in PLANE_COMMANDS:
            self.toggle_plane(PLANE_COMMANDS[command])
        elif command in CAMERA_COMMANDS:
            axis, sign = CAMERA_COMMANDS[command]
            self.camera.move_along(axis, sign * config.CAMERA_STEP)
        else:
            match command:
                case Command.TOGGLE_ANIMATE:
                    self.toggle_animation()
                case Command.TOGGLE_RESET_MODE:
                    self.toggle_reset_mode()
                case Command.SPEED_UP:
                    self.adjust_speed(config.ROTATION_SPEED_STEP)
                case Command.SPEED_DOWN:
                    self.adjust_speed(-config.ROTATION_SPEED_STEP)
                case Command.VIEWER_DISTANCE_IN:
                    self.camera.adjust_viewer_distance(-config.DISTANCE_STEP)
                case Command.VIEWER_DISTANCE_OUT:
                    self.camera.adjust_viewer_distance(config.DISTANCE_STEP)

    def toggle_animation(self) -> None:
        self.rotation.animating = not self.rotation.animating

    def toggle_plane(self, plane: RotationPlane) -> None:
        self.rotation.active[plane] = not self.rotation.active[plane]

    def toggle_reset_mode(self) -> None:
        if self.rotation.reset_each_frame:
            self.rotation.mode = RotationMode.CUMULATIVE
        else:
            self.rotation.mode = RotationMode.ABSOLUTE
            # snap back to the canonical pose right away
            self.scene.reset_all()
        logger.debug(f"Rotation mode: {self.rotation.mode}")

    def adjust_speed(self, delta: float) -> None:
        self.rotation.speed = max(config.MIN_ROTATION_SPEED, self.rotation.speed + delta)

    def adjust_viewer_distance(self, delta: float) -> None:
        self.camera.adjust_viewer_distance(delta)

    def adjust_screen_distance(self, delta: float) -> None:
        self.camera.adjust_screen_distance(delta)

    def select_object(self, index: int) -> None:
        self.scene.select(index)
        self._reset_hidden()

    def select_next_object(self) -> None:
        self.scene.select_next()
        self._reset_hidden()

    def _reset_hidden(self) -> None:
        # Objects that stop being targets keep no stale rotation
        if not self.show_all:
            targets = self.scene.targets()
            for obj in self.scene:
                if obj not in targets:
                    obj.reset_transform()

    # ---- overlay ----

    def status_lines(self) -> list[str]:
        planes = " ".join(plane.label for plane in self.rotation.active_planes)
        p = self.camera.position
        lines = [
            f"Active Rotations: {planes}",
            f"Speed: {self.rotation.speed:.3f} rad/s",
            f"Animation: {'Running' if self.rotation.animating else 'Paused'}",
            f"Mode: {self.rotation.mode}",
            f"Viewer Distance: {self.camera.viewer_distance:.2f}",
            f"Screen Distance: {self.camera.screen_distance:.2f}",
            f"Camera Position: ({p.x:.2f}, {p.y:.2f}, {p.z:.2f}, {p.w:.2f})",
        ]
        selected = self.scene.selected
        if selected is not None:
            lines.append(f"Object: {selected.name}")
            lines.append(f"Vertices: {selected.vertex_count}, Edges: {selected.edge_count}")
        return lines
