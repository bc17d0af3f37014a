"""Loading of height-map files into a rectangular grid of heights and colors.

A map file holds one row of the grid per line. Tokens on a line are separated
by spaces or tabs and every line must hold the same number of tokens. Blank
lines are not allowed, neither at the start nor between rows.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from wireframe.parsing import MapFormatError, parse_point

__all__ = [
    "EmptyMapError",
    "HeightMap",
    "MapFormatError",
    "parse_map",
    "read_map",
    "split_words",
]


class EmptyMapError(ValueError):
    """Raised when a map file holds no rows at all."""


@dataclass
class HeightMap:
    """A rectangular grid of heights with one color per point.

    ``field[i][j]`` is the height at row ``i``, column ``j``; ``colors``
    has the same shape and holds 24-bit RGB values.
    """

    field: list[list[int]]
    colors: list[list[int]]

    def __post_init__(self) -> None:
        if not self.field or not self.field[0]:
            raise ValueError("a height map needs at least one point")
        width = len(self.field[0])
        if any(len(row) != width for row in self.field):
            raise ValueError("height map rows differ in length")
        if len(self.colors) != len(self.field) or any(
            len(row) != width for row in self.colors
        ):
            raise ValueError("color grid does not match the height grid")

    @property
    def size_x(self) -> int:
        """Number of columns."""
        return len(self.field[0])

    @property
    def size_y(self) -> int:
        """Number of rows."""
        return len(self.field)

    @property
    def max_height(self) -> int:
        """Largest height in the grid."""
        return max(max(row) for row in self.field)

    @property
    def min_height(self) -> int:
        """Smallest height in the grid."""
        return min(min(row) for row in self.field)


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between separators."""
    return [word for word in text.split(sep) if word]


def _check_blank_lines(text: str) -> None:
    if text.startswith("\n"):
        raise MapFormatError("map starts with an empty line")
    if "\n\n" in text:
        raise MapFormatError("map contains an empty line")


def parse_map(text: str) -> HeightMap:
    """Build a :class:`HeightMap` from the text of a map file.

    Raises :class:`EmptyMapError` when there are no rows and
    :class:`MapFormatError` for any malformed content.
    """
    text = text.replace("\t", " ")
    _check_blank_lines(text)
    lines = split_words(text, "\n")
    if not lines:
        raise EmptyMapError("map has no rows")

    rows = [split_words(line, " ") for line in lines]
    width = len(rows[0])
    for number, row in enumerate(rows, start=1):
        if len(row) != width:
            raise MapFormatError(
                f"line {number} has {len(row)} points, expected {width}"
            )
    if width == 0:
        raise MapFormatError("map has no points")

    field: list[list[int]] = []
    colors: list[list[int]] = []
    for row in rows:
        points = [parse_point(token) for token in row]
        field.append([height for height, _ in points])
        colors.append([color for _, color in points])
    return HeightMap(field=field, colors=colors)


def read_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse the map file at ``path``.

    Errors opening or reading the file propagate as :class:`OSError`.
    """
    with open(path, "rb") as handle:
        raw = handle.read()
    # Content ends at the first NUL byte, as with a C string.
    text = raw.decode("latin-1").split("\0", 1)[0]
    return parse_map(text)