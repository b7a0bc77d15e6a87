"""Line segments in map space and the transforms applied to them."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from fildefer.camera import Camera, View

_ISO_ANGLE = 0.523599
_OBLIQUE_ANGLE = -35.0 * (math.pi / 180.0)


@dataclass(frozen=True)
class Segment:
    """One edge of the wireframe: a start and an end point, raw and projected."""

    sx: float = 0.0
    sy: float = 0.0
    sz: float = 0.0
    ex: float = 0.0
    ey: float = 0.0
    ez: float = 0.0
    proj_sx: float = 0.0
    proj_sy: float = 0.0
    proj_sz: float = 0.0
    proj_ex: float = 0.0
    proj_ey: float = 0.0
    proj_ez: float = 0.0


def isometric(segment: Segment) -> Segment:
    """Project with a 30 degree isometric view."""
    cos_a, sin_a = math.cos(_ISO_ANGLE), math.sin(_ISO_ANGLE)
    s = segment
    return replace(
        s,
        proj_sx=(s.sx - s.sy) * cos_a,
        proj_sy=(s.sx + s.sy) * sin_a - s.sz,
        proj_ex=(s.ex - s.ey) * cos_a,
        proj_ey=(s.ex + s.ey) * sin_a - s.ez,
    )


def top_view(segment: Segment) -> Segment:
    """Project from above, ignoring heights."""
    s = segment
    return replace(s, proj_sx=s.sx, proj_sy=s.sy, proj_ex=s.ex, proj_ey=s.ey)


def width_side_view(segment: Segment) -> Segment:
    """Project along the y axis."""
    s = segment
    return replace(s, proj_sx=s.sx, proj_sy=-s.sz, proj_ex=s.ex, proj_ey=-s.ez)


def height_side_view(segment: Segment) -> Segment:
    """Project along the x axis."""
    s = segment
    return replace(s, proj_sx=s.sz, proj_sy=s.sy, proj_ex=s.ez, proj_ey=s.ey)


def oblique_view(segment: Segment) -> Segment:
    """Project obliquely, shifting points by their height at -35 degrees."""
    cos_a, sin_a = math.cos(_OBLIQUE_ANGLE), math.sin(_OBLIQUE_ANGLE)
    s = segment
    return replace(
        s,
        proj_sx=s.sx + cos_a * s.sz,
        proj_sy=s.sy + sin_a * s.sz,
        proj_ex=s.ex + cos_a * s.ez,
        proj_ey=s.ey + sin_a * s.ez,
    )


_PROJECTIONS = {
    View.ISOMETRIC: isometric,
    View.TOP: top_view,
    View.OBLIQUE: oblique_view,
    View.WIDTH_SIDE: width_side_view,
    View.HEIGHT_SIDE: height_side_view,
}


def project(segment: Segment, view: View) -> Segment:
    """Apply the projection named by ``view``."""
    return _PROJECTIONS[View(view)](segment)


def rotate_x(segment: Segment, angle: float, z_offset: float) -> Segment:
    """Rotate about the x axis; heights are corrected by ``z_offset * 3``."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    factor = z_offset * 3
    s = segment
    sy = s.sy * cos_a - (s.sz * sin_a) / factor
    ey = s.ey * cos_a - (s.ez * sin_a) / factor
    return replace(
        s,
        sy=sy,
        proj_sz=sy * sin_a + (s.sz * cos_a) / factor,
        ey=ey,
        proj_ez=ey * sin_a + (s.ez * cos_a) / factor,
    )


def rotate_y(segment: Segment, angle: float, z_offset: float) -> Segment:
    """Rotate about the y axis; heights are corrected by ``z_offset * 3``."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    factor = z_offset * 3
    s = segment
    sx = s.sx * cos_a + (s.sz * sin_a) / factor
    ex = s.ex * cos_a + (s.ez * sin_a) / factor
    return replace(
        s,
        sx=sx,
        proj_sz=sx * sin_a + (s.sz * cos_a) / factor,
        ex=ex,
        proj_ez=ex * sin_a + (s.ez * cos_a) / factor,
    )


def rotate_z(segment: Segment, angle: float) -> Segment:
    """Rotate about the z axis; the new x feeds into the new y."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    s = segment
    sx = s.sx * cos_a + s.sy * sin_a
    ex = s.ex * cos_a + s.ey * sin_a
    return replace(
        s,
        sx=sx,
        sy=sx * sin_a + s.sy * cos_a,
        ex=ex,
        ey=ex * sin_a + s.ey * cos_a,
    )


def rotate(segment: Segment, camera: Camera) -> Segment:
    """Apply the camera's x, y and z rotations in that order."""
    segment = rotate_x(segment, camera.angle_x, camera.z_offset)
    segment = rotate_y(segment, camera.angle_y, camera.z_offset)
    return rotate_z(segment, camera.angle_z)


def translate(segment: Segment, camera: Camera) -> Segment:
    """Shift the projected points by the camera offsets."""
    s = segment
    return replace(
        s,
        proj_sx=s.proj_sx + camera.x_offset,
        proj_sy=s.proj_sy + camera.y_offset,
        proj_ex=s.proj_ex + camera.x_offset,
        proj_ey=s.proj_ey + camera.y_offset,
    )