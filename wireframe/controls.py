"""Keyboard and mouse-wheel handling for the wireframe view."""

from __future__ import annotations

from enum import Enum

from wireframe.projection import ViewState

__all__ = [
    "COLOR_MODES",
    "Key",
    "ROTATION_STEP",
    "SHIFT_STEP",
    "ZOOM_IN",
    "ZOOM_OUT",
    "apply_key",
    "apply_scroll",
]

SHIFT_STEP = 10
ROTATION_STEP = 3
COLOR_MODES = 4
ZOOM_IN = 1.0204081632653061224489795918367346
ZOOM_OUT = 0.98


class Key(Enum):
    """Keys that change the view."""

    W = "w"
    A = "a"
    S = "s"
    D = "d"
    PERIOD = "."
    COMMA = ","
    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    ONE = "1"
    TWO = "2"
    C = "c"
    I = "i"  # noqa: E741
    O = "o"  # noqa: E741
    ESCAPE = "escape"


_SHIFTS = {
    Key.W: (0, -SHIFT_STEP),
    Key.A: (-SHIFT_STEP, 0),
    Key.S: (0, SHIFT_STEP),
    Key.D: (SHIFT_STEP, 0),
}

_ROTATIONS = {
    Key.PERIOD: ("alpha", ROTATION_STEP),
    Key.COMMA: ("alpha", -ROTATION_STEP),
    Key.RIGHT: ("beta", ROTATION_STEP),
    Key.LEFT: ("beta", -ROTATION_STEP),
    Key.UP: ("gamma", ROTATION_STEP),
    Key.DOWN: ("gamma", -ROTATION_STEP),
}

_PROJECTIONS = {Key.ONE: 1, Key.TWO: 2}


def apply_key(view: ViewState, key: Key | None) -> bool:
    """Update ``view`` for a key event.

    Returns ``False`` when the key asks to close the window, ``True`` when
    the view should be redrawn. Unknown keys (``None``) change nothing.
    """
    if key in _SHIFTS:
        dx, dy = _SHIFTS[key]
        view.shift_x += dx
        view.shift_y += dy
    elif key in _ROTATIONS:
        name, step = _ROTATIONS[key]
        setattr(view, name, getattr(view, name) + step)
    elif key in _PROJECTIONS:
        view.mode = _PROJECTIONS[key]
    elif key is Key.C:
        view.color_mode = (view.color_mode + 1) % COLOR_MODES
    elif key is Key.I:
        view.inverted = True
    elif key is Key.O:
        view.inverted = False
    elif key is Key.ESCAPE:
        return False
    return True


def apply_scroll(view: ViewState, xdelta: float, ydelta: float) -> float:
    """Zoom in on an upward scroll and out on a downward one; return the zoom."""
    del xdelta
    if ydelta > 0:
        view.zoom *= ZOOM_IN
    elif ydelta < 0:
        view.zoom *= ZOOM_OUT
    return view.zoom