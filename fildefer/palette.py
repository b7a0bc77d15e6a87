"""Colours for wireframe pixels, chosen from the heights of a segment's ends."""

from __future__ import annotations

import math
from dataclasses import dataclass

from fildefer.camera import Scheme
from fildefer.canvas import rgba

Rgb = tuple[int, int, int]

_OPAQUE = 255


@dataclass(frozen=True)
class _ClassicColors:
    both_below: Rgb
    mixed: Rgb
    both_flat: Rgb
    one_above: Rgb
    both_above: Rgb


_CLASSIC = {
    Scheme.ICEWINDALE: _ClassicColors(
        both_below=(0, 0, 128),
        mixed=(51, 51, 255),
        both_flat=(0, 0, 0),
        one_above=(0, 138, 230),
        both_above=(51, 204, 204),
    ),
    Scheme.PHANDELVER: _ClassicColors(
        both_below=(102, 34, 0),
        mixed=(153, 51, 0),
        both_flat=(153, 102, 0),
        one_above=(38, 115, 38),
        both_above=(0, 255, 0),
    ),
    Scheme.STRAHD: _ClassicColors(
        both_below=(102, 0, 102),
        mixed=(153, 0, 153),
        both_flat=(204, 0, 255),
        one_above=(153, 0, 255),
        both_above=(0, 0, 255),
    ),
    Scheme.AVERNUS: _ClassicColors(
        both_below=(77, 0, 0),
        mixed=(153, 0, 0),
        both_flat=(230, 0, 0),
        one_above=(255, 153, 0),
        both_above=(255, 255, 0),
    ),
}


@dataclass(frozen=True)
class _GradientColors:
    flat: Rgb
    base: Rgb
    peak: Rgb


_GRADIENTS = {
    Scheme.STANDARD: _GradientColors(
        flat=(0, 0, 0), base=(0, 0, 0), peak=(255, 255, 255)
    ),
    Scheme.ICEWINDALE: _GradientColors(
        flat=(0, 0, 255), base=(0, 0, 255), peak=(102, 255, 255)
    ),
    Scheme.PHANDELVER: _GradientColors(
        flat=(0, 0, 0), base=(0, 0, 0), peak=(0, 255, 0)
    ),
    Scheme.STRAHD: _GradientColors(
        flat=(0, 0, 255), base=(0, 0, 255), peak=(255, 0, 255)
    ),
    Scheme.AVERNUS: _GradientColors(
        flat=(230, 0, 0), base=(230, 0, 0), peak=(230, 230, 0)
    ),
}

_RAINBOW_POSITIVE = (
    (0.125, (145, 225, 64)),
    (0.250, (160, 195, 0)),
    (0.375, (175, 165, 0)),
    (0.500, (190, 135, 0)),
    (0.625, (205, 105, 0)),
    (0.750, (205, 75, 0)),
    (0.875, (235, 45, 0)),
)
_RAINBOW_POSITIVE_TOP = (255, 0, 0)

_RAINBOW_NEGATIVE = (
    (-0.125, (64, 225, 145)),
    (-0.250, (0, 195, 160)),
    (-0.375, (0, 165, 175)),
    (-0.500, (0, 135, 190)),
    (-0.625, (0, 105, 205)),
    (-0.750, (0, 75, 205)),
    (-0.875, (0, 45, 235)),
)
_RAINBOW_NEGATIVE_BOTTOM = (0, 0, 255)

_RAINBOW_FLAT = (164, 255, 164)


def _pack(color: Rgb) -> int:
    return rgba(*color, _OPAQUE)


def _sign(value: float) -> int:
    truncated = int(value)
    return (truncated > 0) - (truncated < 0)


def classic_color(scheme: Scheme, sz: float, ez: float) -> int:
    """Colour of the classic viewer for a segment with end heights ``sz`` and ``ez``.

    Heights are truncated toward zero before they are compared with zero.
    """
    scheme = Scheme(scheme)
    if scheme is Scheme.STANDARD:
        return _pack((0, 0, 0))
    colors = _CLASSIC.get(scheme)
    if colors is None:
        raise ValueError(f"scheme {scheme.value!r} is not available in this mode")
    start, end = _sign(sz), _sign(ez)
    if start < 0 and end < 0:
        return _pack(colors.both_below)
    if start > 0 and end > 0:
        return _pack(colors.both_above)
    if start == 0 and end == 0:
        return _pack(colors.both_flat)
    if start < 0 or end < 0:
        return _pack(colors.mixed)
    return _pack(colors.one_above)


def _lerp(start: Rgb, end: Rgb, progress: float) -> Rgb:
    return tuple(
        int((1 - progress) * a + progress * b) for a, b in zip(start, end)
    )


def gradient_color(scheme: Scheme, sz: float, ez: float, progress: float) -> int:
    """Colour of the bonus viewer at ``progress`` (0 to 1) along a segment.

    A progress that is not a finite number is taken as 0.
    """
    scheme = Scheme(scheme)
    colors = _GRADIENTS.get(scheme)
    if colors is None:
        raise ValueError(f"scheme {scheme.value!r} has no gradient")
    if not math.isfinite(progress):
        progress = 0.0
    start, end = _sign(sz), _sign(ez)
    if start == 0 and end == 0:
        return _pack(colors.flat)
    if (start == 0) or (start > 0 and end < 0):
        return _pack(_lerp(colors.base, colors.peak, progress))
    if (end == 0) or (start < 0 and end > 0):
        return _pack(_lerp(colors.peak, colors.base, progress))
    return _pack(colors.peak)


def rainbow_positive(z_factor: float) -> int | None:
    """Rainbow colour for a positive relative height; None when it is NaN."""
    if math.isnan(z_factor):
        return None
    for limit, color in _RAINBOW_POSITIVE:
        if z_factor < limit:
            return _pack(color)
    return _pack(_RAINBOW_POSITIVE_TOP)


def rainbow_negative(z_factor: float) -> int | None:
    """Rainbow colour for a negative relative height; None when it is NaN."""
    if math.isnan(z_factor):
        return None
    for limit, color in _RAINBOW_NEGATIVE:
        if z_factor > limit:
            return _pack(color)
    return _pack(_RAINBOW_NEGATIVE_BOTTOM)


def _relative_height(sz: float, ez: float, z_max: float) -> float:
    mean = (sz + ez) / 2
    if z_max == 0:
        if mean == 0 or math.isnan(mean):
            return math.nan
        return math.copysign(math.inf, mean) * math.copysign(1.0, z_max)
    return mean / z_max


def rainbow_color(sz: float, ez: float, z_max: float) -> int | None:
    """Colour from the mean height of a segment relative to the map's highest point.

    Returns None when the relative height is undefined.
    """
    z_factor = _relative_height(sz, ez, z_max)
    if z_factor > 0:
        return rainbow_positive(z_factor)
    if z_factor < 0:
        return rainbow_negative(z_factor)
    if z_factor == 0:
        return _pack(_RAINBOW_FLAT)
    return None