"""Viewer state: display mode, colour scheme, projection and camera settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Mode(Enum):
    """Which flavour of the viewer is running."""

    CLASSIC = "classic"
    BONUS = "bonus"


class Scheme(Enum):
    """Colour schemes used to paint the wireframe."""

    STANDARD = "standard"
    ICEWINDALE = "icewindale"
    PHANDELVER = "phandelver"
    STRAHD = "strahd"
    AVERNUS = "avernus"
    RAINBOW = "rainbow"


class View(Enum):
    """Projections from map space onto the screen."""

    ISOMETRIC = "isometric"
    TOP = "top"
    OBLIQUE = "oblique"
    WIDTH_SIDE = "width_side"
    HEIGHT_SIDE = "height_side"


@dataclass(frozen=True)
class Layout:
    """Window geometry for one mode."""

    width: int
    height: int
    menu_width: int
    margin: int
    menu_path: str
    image_x: int


_LAYOUTS = {
    Mode.CLASSIC: Layout(
        width=960,
        height=540,
        menu_width=0,
        margin=0,
        menu_path="./images/menu.png",
        image_x=0,
    ),
    Mode.BONUS: Layout(
        width=1920,
        height=1080,
        menu_width=300,
        margin=25,
        menu_path="./images/menu_bonus.png",
        image_x=300,
    ),
}


def layout_for(mode: Mode) -> Layout:
    """Return the window layout used by ``mode``."""
    return _LAYOUTS[Mode(mode)]


@dataclass
class Camera:
    """Mutable view settings that the key bindings change."""

    mode: Mode = Mode.CLASSIC
    colors: Scheme = Scheme.STANDARD
    projection: View = View.ISOMETRIC
    x_offset: float = 0.0
    y_offset: float = 0.0
    z_offset: float = 1.0
    scale: int = 0
    angle_x: float = 0.0
    angle_y: float = 0.0
    angle_z: float = 0.0
    zoom: float = 0.0
    _defaults: dict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def default(cls, mode: Mode = Mode.CLASSIC) -> "Camera":
        """Build the camera a freshly started viewer uses in ``mode``."""
        camera = cls(mode=Mode(mode))
        camera.reset()
        return camera

    def reset(self) -> None:
        """Restore the start-up settings of the camera's mode."""
        bonus = self.mode is Mode.BONUS
        self.colors = Scheme.STANDARD
        self.projection = View.ISOMETRIC
        self.x_offset = 1.0 if bonus else 0.0
        self.y_offset = 1.0 if bonus else 0.0
        self.z_offset = 0.5 if bonus else 1.0
        self.scale = 0
        self.angle_x = 0.0
        self.angle_y = 0.0
        self.angle_z = 0.0
        self.zoom = 0.0

    def is_rotated(self) -> bool:
        """True when any rotation angle is non-zero."""
        return self.angle_x != 0 or self.angle_y != 0 or self.angle_z != 0