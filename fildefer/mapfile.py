"""Reading ``.fdf`` height maps."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

INT_MIN = -(2**31)

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?)(\d*)")


class MapError(Exception):
    """Raised when a map file cannot be used."""


def count_columns(line: str) -> int:
    """Count the whitespace-separated fields of ``line``."""
    return sum(1 for word in _WHITESPACE.split(line) if word)


def _atoi(token: str) -> int:
    match = _ATOI.match(token)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass(frozen=True)
class HeightMap:
    """A rectangular grid of integer heights, indexed as rows[y][x]."""

    rows: tuple[tuple[int, ...], ...]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def at(self, x: int, y: int) -> int:
        """Return the height at column ``x`` of row ``y``."""
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"point ({x}, {y}) is outside the map")
        return self.rows[y][x]

    def z_max(self) -> int:
        """Return the greatest height in the map."""
        return max((value for row in self.rows for value in row), default=INT_MIN)


def parse_heights(text: str) -> HeightMap:
    """Parse map text; the width is taken from the first line."""
    lines = _lines(text)
    if not lines:
        raise MapError(
            "File is empty / Map doesn't exist / Trying to open a directory ?"
        )
    width = count_columns(lines[0])
    rows = []
    for number, line in enumerate(lines, start=1):
        tokens = [token for token in line.split(" ") if token]
        if len(tokens) < width:
            raise MapError(
                f"Line {number} has {len(tokens)} points, expected {width}"
            )
        rows.append(tuple(_atoi(token) for token in tokens[:width]))
    return HeightMap(tuple(rows))


def check_map_path(path: str | Path) -> Path:
    """Check the extension of ``path`` and that it can be opened."""
    name = str(path)
    dot = name.rfind(".")
    if dot == -1:
        raise MapError("File is invalid")
    if name[dot:] != ".fdf":
        raise MapError("File has an invalid extension")
    target = Path(name)
    try:
        with open(target, "rb"):
            pass
    except IsADirectoryError:
        pass
    except OSError as exc:
        raise MapError("File can't be opened OR File doesn't exist") from exc
    return target


def load_map(path: str | Path) -> HeightMap:
    """Check, read and parse the map file at ``path``."""
    target = check_map_path(path)
    try:
        text = target.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise MapError(
            "File is empty / Map doesn't exist / Trying to open a directory ?"
        ) from exc
    return parse_heights(text)