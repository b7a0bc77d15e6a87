"""Key bindings that change the camera."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Callable

from fildefer.camera import Camera, Mode, Scheme, View


class Key(IntEnum):
    """Keyboard key codes understood by the viewer."""

    SPACE = 32
    MINUS = 45
    DIGIT_1 = 49
    DIGIT_2 = 50
    DIGIT_3 = 51
    DIGIT_4 = 52
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    I = 73  # noqa: E741
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    ESCAPE = 256
    DOWN = 264
    UP = 265


class Outcome(Enum):
    """What the viewer should do after a key press."""

    IGNORED = "ignored"
    REDRAW = "redraw"
    QUIT = "quit"


Action = Callable[[Camera], None]

_QUIT_KEYS = frozenset({Key.ESCAPE, Key.Q})


def _set(attr: str, value) -> Action:
    def apply(camera: Camera) -> None:
        setattr(camera, attr, value)

    return apply


def _shift(attr: str, amount: float) -> Action:
    def apply(camera: Camera) -> None:
        setattr(camera, attr, getattr(camera, attr) + amount)

    return apply


def _nothing(camera: Camera) -> None:
    return None


_CLASSIC_VIEWS = {
    Key.I: View.ISOMETRIC,
    Key.SPACE: View.ISOMETRIC,
    Key.T: View.TOP,
}

_CLASSIC_SCHEMES = {
    Key.SPACE: Scheme.STANDARD,
    Key.DIGIT_1: Scheme.ICEWINDALE,
    Key.DIGIT_2: Scheme.PHANDELVER,
    Key.DIGIT_3: Scheme.STRAHD,
    Key.DIGIT_4: Scheme.AVERNUS,
}

_BONUS_ACTIONS: dict[Key, Action] = {
    Key.I: _set("projection", View.ISOMETRIC),
    Key.T: _set("projection", View.TOP),
    Key.Y: _set("projection", View.OBLIQUE),
    Key.U: _set("projection", View.HEIGHT_SIDE),
    Key.O: _set("projection", View.WIDTH_SIDE),
    Key.P: _nothing,
    Key.D: _shift("x_offset", 25),
    Key.A: _shift("x_offset", -25),
    Key.W: _shift("y_offset", -25),
    Key.S: _shift("y_offset", 25),
    Key.UP: _shift("z_offset", 0.2),
    Key.DOWN: _shift("z_offset", -0.2),
    Key.MINUS: _shift("zoom", -1),
    Key.EQUAL: _shift("zoom", 1),
    Key.Z: _shift("angle_x", 0.1),
    Key.X: _shift("angle_x", -0.1),
    Key.C: _shift("angle_y", 0.1),
    Key.V: _shift("angle_y", -0.1),
    Key.B: _shift("angle_z", 0.1),
    Key.N: _shift("angle_z", -0.1),
    Key.DIGIT_1: _set("colors", Scheme.ICEWINDALE),
    Key.DIGIT_2: _set("colors", Scheme.PHANDELVER),
    Key.DIGIT_3: _set("colors", Scheme.STRAHD),
    Key.DIGIT_4: _set("colors", Scheme.AVERNUS),
    Key.R: _set("colors", Scheme.RAINBOW),
    Key.SPACE: Camera.reset,
}


def _as_key(key) -> Key | None:
    try:
        return Key(key)
    except ValueError:
        return None


def classic_key(camera: Camera, key) -> Outcome:
    """Apply a key press of the classic viewer to ``camera``."""
    key = _as_key(key)
    if key is None:
        return Outcome.IGNORED
    if key in _QUIT_KEYS:
        return Outcome.QUIT
    handled = False
    if key in _CLASSIC_VIEWS:
        camera.projection = _CLASSIC_VIEWS[key]
        handled = True
    if key in _CLASSIC_SCHEMES:
        camera.colors = _CLASSIC_SCHEMES[key]
        handled = True
    return Outcome.REDRAW if handled else Outcome.IGNORED


def bonus_key(camera: Camera, key) -> Outcome:
    """Apply a key press of the bonus viewer to ``camera``."""
    key = _as_key(key)
    if key is None:
        return Outcome.IGNORED
    if key in _QUIT_KEYS:
        return Outcome.QUIT
    action = _BONUS_ACTIONS.get(key)
    if action is None:
        return Outcome.IGNORED
    action(camera)
    return Outcome.REDRAW


def handle_key(camera: Camera, key, mode: Mode) -> Outcome:
    """Apply a key press using the bindings of ``mode``."""
    if Mode(mode) is Mode.BONUS:
        return bonus_key(camera, key)
    return classic_key(camera, key)