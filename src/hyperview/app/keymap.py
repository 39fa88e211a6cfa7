"""
Keyboard Mapping
================
Translates Qt key codes into abstract engine commands.

Why is this file needed?
------------------------
The engine only knows `Command`; it never sees a Qt key. Keeping the table
here means a different front-end (or a test) can drive the engine without
importing Qt at all.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt

from hyperview.engine import Command

KEY_COMMANDS: dict[Qt.Key, Command] = {
    # rotation planes XY, XZ, XW, YZ, YW, ZW
    Qt.Key.Key_1: Command.TOGGLE_PLANE_1,
    Qt.Key.Key_2: Command.TOGGLE_PLANE_2,
    Qt.Key.Key_3: Command.TOGGLE_PLANE_3,
    Qt.Key.Key_4: Command.TOGGLE_PLANE_4,
    Qt.Key.Key_5: Command.TOGGLE_PLANE_5,
    Qt.Key.Key_6: Command.TOGGLE_PLANE_6,

    Qt.Key.Key_Space: Command.TOGGLE_ANIMATE,
    Qt.Key.Key_T: Command.TOGGLE_RESET_MODE,
    Qt.Key.Key_Up: Command.SPEED_UP,
    Qt.Key.Key_Down: Command.SPEED_DOWN,

    # camera
    Qt.Key.Key_D: Command.MOVE_CAMERA_POS_X,
    Qt.Key.Key_A: Command.MOVE_CAMERA_NEG_X,
    Qt.Key.Key_W: Command.MOVE_CAMERA_POS_Y,
    Qt.Key.Key_S: Command.MOVE_CAMERA_NEG_Y,
    Qt.Key.Key_Q: Command.MOVE_CAMERA_POS_Z,
    Qt.Key.Key_E: Command.MOVE_CAMERA_NEG_Z,
    Qt.Key.Key_R: Command.MOVE_CAMERA_POS_W,
    Qt.Key.Key_F: Command.MOVE_CAMERA_NEG_W,

    # '+' pushes the viewer further out along W, '-' pulls it in
    Qt.Key.Key_Plus: Command.VIEWER_DISTANCE_OUT,
    Qt.Key.Key_Equal: Command.VIEWER_DISTANCE_OUT,
    Qt.Key.Key_Minus: Command.VIEWER_DISTANCE_IN,
}

SELECT_NEXT_KEY = Qt.Key.Key_Tab


def command_for_key(key: int | Qt.Key) -> Optional[Command]:
    """Return the command bound to `key`, or None if it is unbound."""
    try:
        return KEY_COMMANDS.get(Qt.Key(key))
    except ValueError:
        return None
