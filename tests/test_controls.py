import math

import pytest

from fildefer.camera import Camera, Mode, Scheme, View
from fildefer.controls import Key, Outcome, bonus_key, classic_key, handle_key


def test_raw_key_codes_are_understood():
    bonus = Camera.default(Mode.BONUS)
    start_z = bonus.z_offset
    assert bonus_key(bonus, 265) is Outcome.REDRAW
    assert math.isclose(bonus.z_offset, start_z + 0.2)
    assert handle_key(bonus, 256, Mode.BONUS) is Outcome.QUIT

    classic = Camera.default(Mode.CLASSIC)
    assert classic_key(classic, 84) is Outcome.REDRAW
    assert classic.projection is View.TOP
    assert classic_key(classic, 32) is Outcome.REDRAW
    assert classic.projection is View.ISOMETRIC


@pytest.mark.parametrize("key", [Key.ESCAPE, Key.Q])
@pytest.mark.parametrize("mode", [Mode.CLASSIC, Mode.BONUS])
def test_quit_keys(key, mode):
    assert handle_key(Camera.default(mode), key, mode) is Outcome.QUIT


def test_classic_projection_keys():
    camera = Camera.default(Mode.CLASSIC)
    assert classic_key(camera, Key.T) is Outcome.REDRAW
    assert camera.projection is View.TOP
    assert classic_key(camera, Key.I) is Outcome.REDRAW
    assert camera.projection is View.ISOMETRIC


@pytest.mark.parametrize(
    "key, scheme",
    [
        (Key.DIGIT_1, Scheme.ICEWINDALE),
        (Key.DIGIT_2, Scheme.PHANDELVER),
        (Key.DIGIT_3, Scheme.STRAHD),
        (Key.DIGIT_4, Scheme.AVERNUS),
    ],
)
def test_classic_color_keys(key, scheme):
    camera = Camera.default(Mode.CLASSIC)
    assert classic_key(camera, key) is Outcome.REDRAW
    assert camera.colors is scheme


def test_classic_space_resets_view_and_colors():
    camera = Camera.default(Mode.CLASSIC)
    camera.projection = View.TOP
    camera.colors = Scheme.STRAHD
    assert classic_key(camera, Key.SPACE) is Outcome.REDRAW
    assert camera.projection is View.ISOMETRIC
    assert camera.colors is Scheme.STANDARD


def test_classic_ignores_bonus_keys():
    camera = Camera.default(Mode.CLASSIC)
    assert classic_key(camera, Key.W) is Outcome.IGNORED
    assert camera == Camera.default(Mode.CLASSIC)


def test_unknown_key_code_is_ignored():
    camera = Camera.default(Mode.BONUS)
    assert bonus_key(camera, 12345) is Outcome.IGNORED
    assert camera == Camera.default(Mode.BONUS)


@pytest.mark.parametrize(
    "key, view",
    [
        (Key.T, View.TOP),
        (Key.Y, View.OBLIQUE),
        (Key.U, View.HEIGHT_SIDE),
        (Key.O, View.WIDTH_SIDE),
    ],
)
def test_bonus_projection_keys(key, view):
    camera = Camera.default(Mode.BONUS)
    assert bonus_key(camera, key) is Outcome.REDRAW
    assert camera.projection is view


def test_bonus_p_redraws_without_change():
    camera = Camera.default(Mode.BONUS)
    assert bonus_key(camera, Key.P) is Outcome.REDRAW
    assert camera == Camera.default(Mode.BONUS)


def test_bonus_translation():
    camera = Camera.default(Mode.BONUS)
    start_x, start_y = camera.x_offset, camera.y_offset
    bonus_key(camera, Key.D)
    assert camera.x_offset == start_x + 25
    bonus_key(camera, Key.A)
    bonus_key(camera, Key.A)
    assert camera.x_offset == start_x - 25
    bonus_key(camera, Key.W)
    assert camera.y_offset == start_y - 25
    bonus_key(camera, Key.S)
    assert camera.y_offset == start_y


def test_bonus_altitude_and_zoom():
    camera = Camera.default(Mode.BONUS)
    start_z = camera.z_offset
    bonus_key(camera, Key.UP)
    assert math.isclose(camera.z_offset, start_z + 0.2)
    bonus_key(camera, Key.DOWN)
    assert math.isclose(camera.z_offset, start_z)
    bonus_key(camera, Key.MINUS)
    assert camera.zoom == -1
    bonus_key(camera, Key.EQUAL)
    assert camera.zoom == 0


def test_bonus_rotation():
    camera = Camera.default(Mode.BONUS)
    bonus_key(camera, Key.Z)
    assert math.isclose(camera.angle_x, 0.1)
    bonus_key(camera, Key.V)
    assert math.isclose(camera.angle_y, -0.1)
    bonus_key(camera, Key.B)
    bonus_key(camera, Key.N)
    bonus_key(camera, Key.N)
    assert math.isclose(camera.angle_z, -0.1)
    assert camera.is_rotated()


def test_bonus_rainbow_key():
    camera = Camera.default(Mode.BONUS)
    assert bonus_key(camera, Key.R) is Outcome.REDRAW
    assert camera.colors is Scheme.RAINBOW


def test_bonus_space_resets_everything():
    camera = Camera.default(Mode.BONUS)
    for key in (Key.D, Key.UP, Key.Z, Key.MINUS, Key.R, Key.Y):
        bonus_key(camera, key)
    assert camera != Camera.default(Mode.BONUS)
    assert bonus_key(camera, Key.SPACE) is Outcome.REDRAW
    assert camera == Camera.default(Mode.BONUS)


def test_handle_key_dispatches_by_mode():
    classic = Camera.default(Mode.CLASSIC)
    bonus = Camera.default(Mode.BONUS)
    assert handle_key(classic, Key.R, Mode.CLASSIC) is Outcome.IGNORED
    assert handle_key(bonus, Key.R, Mode.BONUS) is Outcome.REDRAW
    assert bonus.colors is Scheme.RAINBOW
    assert classic.colors is Scheme.STANDARD