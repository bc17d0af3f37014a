"""Window that shows a height map as an interactive wireframe."""

from __future__ import annotations

import os
import sys
from array import array

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from wireframe.controls import Key, apply_key, apply_scroll  # noqa: E402
from wireframe.mapfile import EmptyMapError, HeightMap, read_map  # noqa: E402
from wireframe.parsing import MapFormatError  # noqa: E402
from wireframe.projection import (  # noqa: E402
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    ViewState,
    fit_zoom,
)
from wireframe.raster import Canvas, render  # noqa: E402

__all__ = ["WINDOW_TITLE", "main", "run_window"]

WINDOW_TITLE = "FdF"
_FPS = 60
_REPEAT_DELAY_MS = 300
_REPEAT_INTERVAL_MS = 30

_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_PERIOD: Key.PERIOD,
    pygame.K_COMMA: Key.COMMA,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_1: Key.ONE,
    pygame.K_2: Key.TWO,
    pygame.K_c: Key.C,
    pygame.K_i: Key.I,
    pygame.K_o: Key.O,
    pygame.K_ESCAPE: Key.ESCAPE,
}


def _to_surface(canvas: Canvas) -> pygame.Surface:
    pixels = array("I", canvas.pixels)
    if sys.byteorder == "little":
        pixels.byteswap()
    return pygame.image.frombuffer(
        pixels.tobytes(), (canvas.width, canvas.height), "RGBA"
    )


def _show(screen: pygame.Surface, view: ViewState, canvas: Canvas) -> None:
    render(view, canvas)
    screen.fill((0, 0, 0))
    screen.blit(_to_surface(canvas), (0, 0))
    pygame.display.flip()


def run_window(hmap: HeightMap) -> ViewState:
    """Show ``hmap`` in a window until it is closed; return the final view."""
    view = ViewState(hmap, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT)
    fit_zoom(view)
    canvas = Canvas(view.width, view.height)
    pygame.init()
    try:
        screen = pygame.display.set_mode((view.width, view.height))
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.key.set_repeat(_REPEAT_DELAY_MS, _REPEAT_INTERVAL_MS)
        clock = pygame.time.Clock()
        _show(screen, view, canvas)
        running = True
        while running:
            redraw = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                # Key handling runs on both press and release.
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    if not apply_key(view, _KEYS.get(event.key)):
                        running = False
                    else:
                        redraw = True
                elif event.type == pygame.MOUSEWHEEL:
                    apply_scroll(view, event.x, event.y)
                    redraw = True
                if not running:
                    break
            if running and redraw:
                _show(screen, view, canvas)
            clock.tick(_FPS)
    finally:
        pygame.quit()
    return view


def main(argv: list[str] | None = None) -> int:
    """Load the map named on the command line and display it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 0
    try:
        hmap = read_map(args[0])
    except EmptyMapError:
        return 0
    except (MapFormatError, OSError) as exc:
        print(f"{args[0]}: {exc}", file=sys.stderr)
        return 1
    run_window(hmap)
    return 0


if __name__ == "__main__":
    sys.exit(main())