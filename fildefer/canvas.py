"""An in-memory RGBA pixel buffer and colour packing."""

from __future__ import annotations

_MASK = 0xFFFFFFFF


def rgba(r: float, g: float, b: float, a: float) -> int:
    """Pack four channel values into one 32-bit colour, red in the top byte.

    Fractional channel values are truncated toward zero.
    """
    r, g, b, a = (int(channel) for channel in (r, g, b, a))
    return (r << 24 | g << 16 | b << 8 | a) & _MASK


class Canvas:
    """A width x height image stored as RGBA bytes, row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid image dimensions {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._pixels = bytearray(self.width * self.height * 4)

    def _offset(self, x: float, y: float) -> int:
        col, row = int(x), int(y)
        if not (0 <= col < self.width and 0 <= row < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return (row * self.width + col) * 4

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Set the pixel at (x, y); coordinates are truncated to integers."""
        start = self._offset(x, y)
        self._pixels[start:start + 4] = (int(color) & _MASK).to_bytes(4, "big")

    def get_pixel(self, x: float, y: float) -> int:
        """Return the packed colour of the pixel at (x, y)."""
        start = self._offset(x, y)
        return int.from_bytes(self._pixels[start:start + 4], "big")

    def fill(self, color: int) -> None:
        """Paint every pixel with ``color``."""
        self._pixels[:] = (int(color) & _MASK).to_bytes(4, "big") * (
            self.width * self.height
        )

    def to_rgba_bytes(self) -> bytes:
        """Return the raw pixel data as R, G, B, A bytes per pixel."""
        return bytes(self._pixels)