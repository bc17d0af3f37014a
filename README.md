# wireframe

A viewer for height maps. It reads a grid of heights from a text file and
draws it as a 3D wireframe in a 1280×720 window, which you can move, rotate,
zoom and recolour from the keyboard and mouse wheel.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
wireframe path/to/map.fdf
```

The command takes exactly one argument, the map file. With any other number
of arguments it does nothing and exits with status 0. If the file cannot be
read or is malformed, the command prints the reason to standard error and
exits with status 1; a map with no rows exits with status 0 without opening
a window.

When the window opens, the map is scaled so that it fills 90% of the window
and is centred in it.

## Map format

A map is a plain text file with one row of the grid per line. Each row is a
list of points separated by spaces (tabs count as spaces). Every row must
have the same number of points.

A point is an integer height, optionally followed by a comma and a colour:

```
0 0 0 0
0 10,0xFF0000 10,0xFF0000 0
0 10,0xFF0000 10,0xFF0000 0
0 0 0 0
```

Rules the reader enforces:

- A height is decimal digits with an optional leading `+` or `-`, and must
  fit in a 32-bit signed integer.
- A colour is either `0x` followed by one to six hexadecimal digits, all in
  the same letter case (`0xff00aa` or `0xFF00AA`, not `0xFf00aa`), or a plain
  decimal number from `0` to `16777215` with no leading zeros.
- A point with no colour is drawn white (`0xFFFFFF`). A comma with nothing
  after it is an error.
- The file must not start with an empty line, and must not contain two
  newlines in a row.
- Reading stops at the first NUL byte in the file.

Any violation makes the whole map invalid.

## Controls

| Input            | Effect                                           |
|------------------|--------------------------------------------------|
| `W` / `S`        | move the picture up / down by 10 pixels          |
| `A` / `D`        | move the picture left / right by 10 pixels       |
| `.` / `,`        | change the first rotation angle by ±3°           |
| `Right` / `Left` | change the second rotation angle by ±3°          |
| `Up` / `Down`    | change the third rotation angle by ±3°           |
| `1`              | isometric projection (the starting projection)   |
| `2`              | top-down (parallel) projection                   |
| `C`              | step to the next of four colour modes            |
| `I`              | invert colours                                   |
| `O`              | restore normal colours                           |
| mouse wheel      | zoom in / out (by a factor of 1/0.98 or 0.98)    |
| `Esc`            | close the window                                 |

Keys act both when pressed and when released, and held keys repeat.
Colour modes 0 and 1 use the colours from the map; modes 2 and 3 colour each
point on a gradient from purple (`0x800080`) at the lowest height towards
orange (`0xFFA500`) at the highest. Inverting replaces each red, green and
blue channel `c` with `255 - c` and switches the background from black to a
light grey.

## Using it as a library

The parts of the viewer can be used on their own:

```python
from wireframe.mapfile import read_map
from wireframe.projection import ViewState, fit_zoom
from wireframe.raster import Canvas, render

hmap = read_map("map.fdf")
print(hmap.size_x, hmap.size_y, hmap.min_height, hmap.max_height)

view = ViewState(hmap, width=640, height=480)
fit_zoom(view)
canvas = Canvas(view.width, view.height)
render(view, canvas)
print(hex(canvas.get_pixel(320, 240)))
```

- `wireframe.parsing` validates single tokens: `parse_height`,
  `parse_color` and `parse_point`, raising `MapFormatError` on bad input.
- `wireframe.mapfile` turns a file or a string into a `HeightMap`
  (`read_map`, `parse_map`); a map with no rows raises `EmptyMapError`.
  A `HeightMap` has `field` and `colors` grids and the `size_x`, `size_y`,
  `min_height` and `max_height` properties.
- `wireframe.projection` holds the rotation and projection maths
  (`rotation_matrix`, `rotate_point`, `project`, `invert_color`,
  `height_color`) and the `ViewState` that describes the current camera;
  `compute_limits` and `fit_zoom` size a view to its window.
- `wireframe.raster` draws a view onto an in-memory `Canvas` of 32-bit RGBA
  pixels (`render`, `draw_line`).
- `wireframe.controls` applies key presses (`Key`) and wheel scrolls to a
  view with `apply_key` and `apply_scroll`; `apply_key` returns `False` for
  `Key.ESCAPE`.
- `wireframe.app` opens the window (`run_window`) and provides the
  `wireframe` command (`main`).

## What it does not do

The viewer only shows a map on screen. It does not save the rendered picture
to an image file, edit maps, or write maps back to disk; a `Canvas` holds its
pixels in memory only.