"""Pixel canvas and line rasterisation of a projected height map."""

from __future__ import annotations

import math
from array import array
from itertools import product

from wireframe.projection import ScreenPoint, ViewState

__all__ = [
    "BACKGROUND",
    "INVERSE_BACKGROUND",
    "Canvas",
    "color_steps",
    "draw_line",
    "render",
    "step_color",
]

BACKGROUND = 0x00000000
INVERSE_BACKGROUND = 0xCCCCC255
_MASK32 = 0xFFFFFFFF


class Canvas:
    """A grid of 32-bit RGBA pixels."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = array("I", [0]) * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)`` to an RGBA value."""
        self.pixels[self._index(x, y)] = color & _MASK32

    def get_pixel(self, x: int, y: int) -> int:
        """RGBA value of the pixel at ``(x, y)``."""
        return self.pixels[self._index(x, y)]

    def clear(self, color: int) -> None:
        """Fill the whole canvas with one RGBA value."""
        self.pixels = array("I", [color & _MASK32]) * (self.width * self.height)


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def color_steps(color1: int, color2: int, steps: int) -> tuple[float, float, float]:
    """Per-step change of the red, green and blue channels from one color to another."""
    if steps == 0:
        return (0.0, 0.0, 0.0)
    color1 = int(color1)
    color2 = int(color2)
    return tuple(
        (((color2 >> shift) & 0xFF) - ((color1 >> shift) & 0xFF)) / steps
        for shift in (16, 8, 0)
    )


def step_color(increments: tuple[float, float, float], color: int, i: int) -> int:
    """Opaque RGBA color of step ``i`` along a gradient starting at ``color``."""
    red, green, blue = (_round_half_away(inc * i) for inc in increments)
    value = int(color) + red * 65536 + green * 256 + blue
    return ((value << 8) | 0xFF) & _MASK32


def draw_line(canvas: Canvas, a: ScreenPoint, b: ScreenPoint) -> None:
    """Draw a color-graded line from ``a`` to ``b``, skipping pixels off the canvas."""
    if not all(math.isfinite(v) for v in (a.x, a.y, b.x, b.y)):
        return
    dx = b.x - a.x
    dy = b.y - a.y
    steps = max(abs(int(dx)), abs(int(dy)))
    increments = color_steps(a.color, b.color, steps)
    step_x = dx / steps if steps else 0.0
    step_y = dy / steps if steps else 0.0
    x, y = a.x, a.y
    for i in range(steps + 1):
        if 0 <= x < canvas.width and 0 <= y < canvas.height:
            canvas.put_pixel(int(x), int(y), step_color(increments, a.color, i))
        x += step_x
        y += step_y


def render(view: ViewState, canvas: Canvas) -> None:
    """Clear the canvas and draw the map's wireframe on it."""
    canvas.clear(INVERSE_BACKGROUND if view.inverted else BACKGROUND)
    hmap = view.hmap
    last_row = hmap.size_y - 1
    last_col = hmap.size_x - 1
    for i, j in product(range(hmap.size_y), range(hmap.size_x)):
        a = view.screen_point(i, j)
        if j != last_col:
            draw_line(canvas, a, view.screen_point(i, j + 1))
        if i != last_row:
            draw_line(canvas, a, view.screen_point(i + 1, j))