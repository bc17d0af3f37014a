"""Rotation and projection of height-map points onto the screen plane."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import lru_cache
from itertools import product

from wireframe.mapfile import HeightMap

__all__ = [
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "FIT_RATIO",
    "HIGH_HEIGHT_COLOR",
    "LOW_HEIGHT_COLOR",
    "Limits",
    "ScreenPoint",
    "ViewState",
    "compute_limits",
    "fit_zoom",
    "height_color",
    "invert_color",
    "project",
    "rotate_point",
    "rotation_matrix",
]

ISO_ANGLE = 0.6
LOW_HEIGHT_COLOR = 0x800080
HIGH_HEIGHT_COLOR = 0xFFA500
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
FIT_RATIO = 0.9

Vector = tuple[float, float, float]
Matrix = tuple[Vector, Vector, Vector]


@dataclass
class Limits:
    """Bounding box of the projected map before scaling."""

    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0


@dataclass(frozen=True)
class ScreenPoint:
    """A map point placed on the screen, with its 24-bit RGB color."""

    x: float
    y: float
    color: int


@lru_cache(maxsize=128)
def rotation_matrix(alpha: float, beta: float, gamma: float) -> Matrix:
    """Rotation matrix for yaw ``alpha``, pitch ``beta`` and roll ``gamma`` in degrees."""
    a, b, g = (math.radians(angle) for angle in (alpha, beta, gamma))
    ca, sa = math.cos(a), math.sin(a)
    cb, sb = math.cos(b), math.sin(b)
    cg, sg = math.cos(g), math.sin(g)
    return (
        (ca * cb, ca * sb * sg - sa * cg, ca * sb * cg + sa * sg),
        (sa * cb, sa * sb * sg + ca * cg, sa * sb * cg - ca * sg),
        (-sb, cb * sg, cb * cg),
    )


def rotate_point(matrix: Matrix, hmap: HeightMap, i: int, j: int) -> Vector:
    """Rotate the point at row ``i``, column ``j`` about the grid centre."""
    cx = hmap.size_x // 2
    cy = hmap.size_y // 2
    dx = j - cx
    dy = i - cy
    height = hmap.field[i][j]
    x, y, z = (row[0] * dx + row[1] * dy + row[2] * height for row in matrix)
    return (x + cx, y + cy, z)


def project(coordinates: Vector, mode: int) -> tuple[float, float]:
    """Project 3D coordinates to 2D.

    Modes 0 and 1 give the isometric view, mode 2 the view from above.
    """
    x, y, z = coordinates
    if mode in (0, 1):
        return (
            (x - y) * math.cos(ISO_ANGLE),
            (x + y) * math.sin(ISO_ANGLE) - z,
        )
    if mode == 2:
        return (x, y)
    raise ValueError(f"unknown projection mode {mode!r}")


def invert_color(color: int) -> int:
    """Invert each channel of a 24-bit RGB color."""
    color = int(color)
    blue = 255 - color % 256
    color >>= 8
    green = 255 - color % 256
    color >>= 8
    red = 255 - color % 256
    return (red << 16) + (green << 8) + blue


def _height_color(height: int, low: int, high: int) -> int:
    if high == low:
        return LOW_HEIGHT_COLOR
    coef = (height - low) / abs(high - low)
    return LOW_HEIGHT_COLOR + int(coef * (HIGH_HEIGHT_COLOR - LOW_HEIGHT_COLOR))


def height_color(hmap: HeightMap, i: int, j: int) -> int:
    """Color of a point picked from a purple-to-orange ramp by its height."""
    return _height_color(hmap.field[i][j], hmap.min_height, hmap.max_height)


@dataclass
class ViewState:
    """Everything that decides how a height map is placed on the screen."""

    hmap: HeightMap
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    mode: int = 0
    color_mode: int = 0
    inverted: bool = False
    zoom: float = 1.0
    shift_x: int = 0
    shift_y: int = 0
    alpha: int = 0
    beta: int = 0
    gamma: int = 0
    limits: Limits = field(default_factory=Limits)
    _height_range: tuple[int, int] = field(
        default=(0, 0), init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._height_range = (self.hmap.min_height, self.hmap.max_height)

    @property
    def matrix(self) -> Matrix:
        """Rotation matrix for the current angles."""
        return rotation_matrix(self.alpha, self.beta, self.gamma)

    def screen_point(self, i: int, j: int) -> ScreenPoint:
        """Screen position and color of the point at row ``i``, column ``j``."""
        x, y = project(rotate_point(self.matrix, self.hmap, i, j), self.mode)
        lim = self.limits
        x = (x - (lim.max_x + lim.min_x) / 2) * self.zoom
        y = (y - (lim.max_y + lim.min_y) / 2) * self.zoom
        x += self.width / 2 + self.shift_x
        y += self.height / 2 + self.shift_y
        if self.color_mode < 2:
            color = self.hmap.colors[i][j]
        else:
            low, high = self._height_range
            color = _height_color(self.hmap.field[i][j], low, high)
        if self.inverted:
            color = invert_color(color)
        return ScreenPoint(x, y, color)


def compute_limits(view: ViewState) -> Limits:
    """Bounding box of all map points after rotation and projection."""
    hmap = view.hmap
    matrix = view.matrix
    points = [
        project(rotate_point(matrix, hmap, i, j), view.mode)
        for i, j in product(range(hmap.size_y), range(hmap.size_x))
    ]
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return Limits(min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys))


def fit_zoom(view: ViewState) -> float:
    """Set the view's limits and a zoom that fills 90% of the screen.

    A map that projects to a single point keeps a zoom of 1.
    """
    view.limits = compute_limits(view)
    lim = view.limits
    x_diff = lim.max_x - lim.min_x
    y_diff = lim.max_y - lim.min_y
    if x_diff / view.width > y_diff / view.height:
        zoom = FIT_RATIO * view.width / x_diff
    elif y_diff > 0:
        zoom = FIT_RATIO * view.height / y_diff
    else:
        zoom = 1.0
    view.zoom = zoom
    return zoom