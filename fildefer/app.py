"""Command-line entry point and interactive window for the wireframe viewer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from fildefer.camera import Camera, Mode, layout_for
from fildefer.canvas import Canvas
from fildefer.controls import Key, Outcome, handle_key
from fildefer.mapfile import MapError, load_map
from fildefer.renderer import Renderer

KNRM = "\x1b[m"
KRED = "\x1b[31m"
KYEL = "\x1b[33m"

_USAGE = "Usage : ./fdf <map.fdf>\n"
_FRAME_RATE = 60


class UsageError(Exception):
    """Raised when the command line does not name exactly one map."""


def _usage_message(detail: str) -> str:
    return f"{_USAGE}{KYEL}\t-> {detail} <-\n{KNRM}"


class Viewer:
    """A loaded map together with the camera, canvas and renderer that show it."""

    def __init__(self, path: str | Path, mode: Mode = Mode.CLASSIC) -> None:
        self.path = str(path)
        self.mode = Mode(mode)
        self.heightmap = load_map(path)
        if self.heightmap.width == 0:
            raise MapError("Map has no points")
        self.layout = layout_for(self.mode)
        self.camera = Camera.default(self.mode)
        self.canvas = Canvas(self.layout.width, self.layout.height)
        self.renderer = Renderer(self.heightmap, self.camera, self.canvas, self.mode)
        self.running = True
        self.pixels_drawn = self.renderer.draw()

    def press(self, key) -> Outcome:
        """Handle one key press and redraw when the view changed."""
        outcome = handle_key(self.camera, key, self.mode)
        if outcome is Outcome.QUIT:
            self.running = False
        elif outcome is Outcome.REDRAW:
            self.pixels_drawn = self.renderer.draw()
        return outcome

    def run(self) -> None:
        """Open a window and show the map until it is closed or quit."""
        import pygame

        pygame.init()
        try:
            self._loop(pygame)
        finally:
            pygame.quit()

    def _key_table(self, pygame) -> dict[int, Key]:
        table = {pygame.K_ESCAPE: Key.ESCAPE, pygame.K_UP: Key.UP, pygame.K_DOWN: Key.DOWN}
        for key in Key:
            if key in (Key.ESCAPE, Key.UP, Key.DOWN):
                continue
            code = int(key)
            if ord("A") <= code <= ord("Z"):
                code = code + (ord("a") - ord("A"))
            table[code] = key
        return table

    def _image(self, pygame):
        size = (self.canvas.width, self.canvas.height)
        return pygame.image.frombuffer(self.canvas.to_rgba_bytes(), size, "RGBA")

    def _load_menu(self, pygame):
        try:
            return pygame.image.load(self.layout.menu_path)
        except (pygame.error, OSError, FileNotFoundError) as exc:
            raise RuntimeError(f"{KRED}Menu initialization failed\n{KNRM}") from exc

    def _loop(self, pygame) -> None:
        try:
            screen = pygame.display.set_mode((self.layout.width, self.layout.height))
        except pygame.error as exc:
            raise RuntimeError(f"{KRED}MLX initialization failed\n{KNRM}") from exc
        pygame.display.set_caption(self.path)
        pygame.key.set_repeat(300, 50)
        keys = self._key_table(pygame)
        image = self._image(pygame)
        menu = self._load_menu(pygame)
        clock = pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN and event.key in keys:
                    if self.press(keys[event.key]) is Outcome.REDRAW:
                        image = self._image(pygame)
            screen.fill((0, 0, 0))
            screen.blit(image, (self.layout.image_x, 0))
            screen.blit(menu, (0, 0))
            pygame.display.flip()
            clock.tick(_FRAME_RATE)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="fdf", description="Show a .fdf height map as a wireframe."
    )
    parser.add_argument("files", nargs="*", metavar="map.fdf", help="map to display")
    parser.add_argument(
        "--bonus",
        action="store_true",
        help="use the extended viewer with rotation, zoom and more projections",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the viewer; return the process exit status."""
    args = build_parser().parse_args(argv)
    mode = Mode.BONUS if args.bonus else Mode.CLASSIC
    try:
        if len(args.files) != 1:
            needed = "An argument is needed" if mode is Mode.BONUS else "One argument is needed"
            raise UsageError(_usage_message(needed))
        try:
            viewer = Viewer(args.files[0], mode)
        except MapError as exc:
            raise UsageError(_usage_message(str(exc))) from exc
        viewer.run()
    except (UsageError, RuntimeError) as exc:
        sys.stderr.write(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())