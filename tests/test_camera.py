import pytest

from fildefer.camera import Camera, Layout, Mode, Scheme, View, layout_for


def test_classic_layout_matches_window_settings():
    layout = layout_for(Mode.CLASSIC)
    assert (layout.width, layout.height) == (960, 540)
    assert layout.menu_path == "./images/menu.png"
    assert layout.menu_width == 0


def test_bonus_layout_matches_window_settings():
    layout = layout_for(Mode.BONUS)
    assert (layout.width, layout.height) == (1920, 1080)
    assert layout.menu_width == 300
    assert layout.margin == 25
    assert layout.menu_path == "./images/menu_bonus.png"
    assert layout.image_x == 300


def test_layout_is_shared_and_frozen():
    layout = layout_for(Mode.BONUS)
    assert layout is layout_for(Mode.BONUS)
    assert isinstance(layout, Layout)
    with pytest.raises(AttributeError):
        layout.width = 10


def test_classic_default_camera():
    cam = Camera.default(Mode.CLASSIC)
    assert cam.colors is Scheme.STANDARD
    assert cam.projection is View.ISOMETRIC
    assert (cam.x_offset, cam.y_offset) == (0, 0)
    assert cam.scale == 0
    assert cam.is_rotated() is False


def test_bonus_default_camera():
    cam = Camera.default(Mode.BONUS)
    assert (cam.x_offset, cam.y_offset) == (1, 1)
    assert cam.z_offset == 0.5
    assert cam.zoom == 0
    assert cam.mode is Mode.BONUS


@pytest.mark.parametrize("axis", ["angle_x", "angle_y", "angle_z"])
def test_is_rotated_for_each_axis(axis):
    cam = Camera.default(Mode.BONUS)
    setattr(cam, axis, 0.1)
    assert cam.is_rotated() is True


@pytest.mark.parametrize("mode", [Mode.CLASSIC, Mode.BONUS])
def test_reset_restores_defaults(mode):
    cam = Camera.default(mode)
    cam.colors = Scheme.RAINBOW
    cam.projection = View.OBLIQUE
    cam.x_offset = 75
    cam.y_offset = -50
    cam.z_offset = 3.1
    cam.angle_x = 0.3
    cam.zoom = -4
    cam.scale = 12
    cam.reset()
    assert cam == Camera.default(mode)
    assert cam.is_rotated() is False