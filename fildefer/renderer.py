"""Drawing a height map as a wireframe onto a canvas."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Iterator

from fildefer.camera import Camera, Mode, Scheme, layout_for
from fildefer.canvas import Canvas, rgba
from fildefer.mapfile import HeightMap
from fildefer.palette import classic_color, gradient_color, rainbow_color
from fildefer.projection import Segment, project, rotate, translate

BACKGROUND = rgba(102, 102, 102, 115)

_ZOOM_LIMIT = -19


def dda(sx: float, sy: float, ex: float, ey: float) -> Iterator[tuple[float, float, float]]:
    """Walk from (sx, sy) to (ex, ey) one step along the longer axis at a time.

    Yields ``(x, y, progress)`` where progress runs from 0 at the start to 1
    at the end. A line of zero length yields its single point.
    """
    if not all(math.isfinite(value) for value in (sx, sy, ex, ey)):
        return
    delta_x = ex - sx
    delta_y = ey - sy
    delta_max = max(abs(delta_x), abs(delta_y))
    if delta_max == 0:
        yield sx, sy, 0.0
        return
    step_x = delta_x / delta_max
    step_y = delta_y / delta_max
    x, y = sx, sy
    pixel = 0
    while pixel <= delta_max:
        yield x, y, pixel / delta_max
        x += step_x
        y += step_y
        pixel += 1


class Renderer:
    """Turns a height map and camera settings into pixels on a canvas."""

    def __init__(
        self,
        heightmap: HeightMap,
        camera: Camera,
        canvas: Canvas,
        mode: Mode | None = None,
    ) -> None:
        self.heightmap = heightmap
        self.camera = camera
        self.canvas = canvas
        self.mode = Mode(mode) if mode is not None else camera.mode
        self.layout = layout_for(self.mode)
        self.z_max = heightmap.z_max()

    @property
    def _bonus(self) -> bool:
        return self.mode is Mode.BONUS

    def map_scale(self) -> int:
        """Work out the grid spacing in pixels and store it on the camera."""
        layout = self.layout
        hm = self.heightmap
        if self._bonus:
            x = int((layout.width - layout.menu_width - layout.margin) / hm.width)
            y = int((layout.height - layout.margin) / hm.height)
            minimum, divisor = 20, 5
        else:
            x = int(layout.width / hm.width)
            y = int(layout.height / hm.height)
            minimum, divisor = 10, 2
        if x < minimum or y < minimum:
            scale = 10
        else:
            scale = min(x, y) // divisor
        self.camera.scale = scale
        return scale

    def _scaled(self, segment: Segment) -> Segment:
        scale = self.map_scale()
        s = segment
        if self._bonus:
            factor = scale + self.camera.zoom
            z_factor = factor / scale
            return replace(
                s,
                sx=s.sx * factor,
                sy=s.sy * factor,
                sz=s.sz * z_factor,
                ex=s.ex * factor,
                ey=s.ey * factor,
                ez=s.ez * z_factor,
            )
        return replace(
            s, sx=s.sx * scale, sy=s.sy * scale, ex=s.ex * scale, ey=s.ey * scale
        )

    def build_segment(self, x: int, y: int, dx: int, dy: int) -> Segment:
        """Build, rotate, scale and project the edge from (x, y) to (x+dx, y+dy)."""
        hm = self.heightmap
        camera = self.camera
        sz = hm.at(x, y)
        ez = hm.at(x + dx, y + dy)
        if self._bonus:
            ox = x - hm.width / 2
            oy = y - hm.height / 2
            segment = Segment(
                sx=ox,
                sy=oy,
                sz=sz * camera.z_offset,
                ex=ox + dx,
                ey=oy + dy,
                ez=ez * camera.z_offset,
            )
            if camera.is_rotated():
                segment = rotate(segment, camera)
        else:
            segment = Segment(
                sx=float(x),
                sy=float(y),
                sz=float(sz),
                ex=float(x + dx),
                ey=float(y + dy),
                ez=float(ez),
            )
        return project(self._scaled(segment), camera.projection)

    def place(self, segment: Segment) -> Segment:
        """Move projected points to their screen position."""
        layout = self.layout
        s = segment
        if self._bonus:
            shift_x = layout.width // 2 - layout.menu_width // 2
            shift_y = layout.height // 2
        else:
            shift_x = layout.width // 2
            shift_y = layout.height // 2 - (
                self.heightmap.height * self.camera.scale / 2
            )
        placed = replace(
            s,
            proj_sx=s.proj_sx + shift_x,
            proj_sy=s.proj_sy + shift_y,
            proj_ex=s.proj_ex + shift_x,
            proj_ey=s.proj_ey + shift_y,
        )
        if self._bonus:
            placed = translate(placed, self.camera)
        return placed

    def _inside(self, x: float, y: float) -> bool:
        layout = self.layout
        if self._bonus:
            margin = layout.margin
            return (
                x > margin
                and y > margin
                and x < layout.width - layout.menu_width - margin
                and y < layout.height - margin
            )
        return x > 0 and y > 0 and x < layout.width and y < layout.height

    def _put(self, segment: Segment, x: float, y: float, progress: float) -> bool:
        camera = self.camera
        if self._bonus:
            if camera.colors is Scheme.RAINBOW:
                color = rainbow_color(segment.sz, segment.ez, self.z_max)
            else:
                color = gradient_color(camera.colors, segment.sz, segment.ez, progress)
        elif camera.colors is Scheme.STANDARD:
            color = classic_color(camera.colors, segment.sz, segment.ez)
            x += camera.x_offset
            y += camera.y_offset
        else:
            color = classic_color(camera.colors, segment.sz, segment.ez)
        if color is None:
            return False
        if not (0 <= x < self.canvas.width and 0 <= y < self.canvas.height):
            return False
        self.canvas.put_pixel(x, y, color)
        return True

    def draw_segment(self, segment: Segment) -> int:
        """Draw a placed segment; return the number of pixels set."""
        count = 0
        for x, y, progress in dda(
            segment.proj_sx, segment.proj_sy, segment.proj_ex, segment.proj_ey
        ):
            if self._inside(x, y) and self._put(segment, x, y, progress):
                count += 1
        return count

    def erase(self) -> None:
        """Paint the whole canvas with the background colour."""
        self.canvas.fill(BACKGROUND)

    def _edge(self, x: int, y: int, dx: int, dy: int, visible: bool) -> int:
        segment = self.place(self.build_segment(x, y, dx, dy))
        return self.draw_segment(segment) if visible else 0

    def draw(self) -> int:
        """Redraw the whole wireframe; return the number of pixels set."""
        self.erase()
        hm = self.heightmap
        visible = not (self._bonus and self.camera.zoom < _ZOOM_LIMIT)
        total = 0
        for y in range(hm.height):
            for x in range(hm.width):
                if x < hm.width - 1:
                    total += self._edge(x, y, 1, 0, visible)
                if y < hm.height - 1:
                    total += self._edge(x, y, 0, 1, visible)
        return total