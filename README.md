# fdfview

Draws a height map as a coloured isometric wireframe and shows it in a window.

## Installing

    pip install .

For the tests:

    pip install ".[test]"
    pytest

## Running

    fdfview path/to/map.fdf

or, equivalently:

    python -m fdfview.cli path/to/map.fdf

The window is 1600 × 1000 pixels, and the wireframe is fitted inside a 15-pixel margin on a black background. Close the window or press Escape to quit.

The command prints an error and exits with status 1 when:

- no file name is given (`Error: Filename missing`);
- more than one argument is given (`Error: Too many arguments`);
- the file cannot be opened (`Error: Could not open file`);
- the file cannot be read as a map, or its first line has no columns (`Error: failed to read file`);
- no window can be opened.

## Map format

A map is a text file. Each line is one row of the grid, with integer heights separated by spaces:

    0 0 0 0
    0 5 5 0
    0 5,0xFF0000 5 0
    0 0 0 0

- The first line sets the number of columns: its leading fields that start with a digit, `+` or `-` are counted.
- Every row takes that many points. A row with fewer fields is an error; fields beyond the count are ignored.
- A height may be followed by a comma and a colour written `0xRRGGBB`. The colour is drawn fully opaque. A point with no colour is drawn white.
- A height outside the 32-bit signed range is an error.

Lines between two points fade from the colour of one point to the colour of the other.

## Using it as a library

```python
from fdfview.parsing import load_map
from fdfview.cli import render

hmap = load_map("map.fdf")
canvas = render(hmap, 800, 600, 10)
print(hex(canvas.get_pixel(10, 10)))
```

`render` projects the map in place and returns a `Canvas` whose pixels are `0xRRGGBBAA` integers; `Canvas.data` holds the raw RGBA bytes. `fdfview.cli.show(canvas)` opens a window on it.

The modules:

- `fdfview.model`: `Point` and `HeightMap`, with `min_coords`, `max_coords` and `flatten`.
- `fdfview.parsing`: `read_map` from lines of text, `load_map` from a file; errors raise `MapError`.
- `fdfview.transform`: `to_isometric`, `zoom`, `shift_top_left` and `fit_to_image`.
- `fdfview.drawing`: `Canvas`, `draw_line` (Bresenham, with a colour gradient) and `connect_points`.
- `fdfview.cli`: `prepare_map`, `render`, `show` and the `main` command.

Smaller helper modules come with the package: `charclass` (ASCII classification), `intconv` (`atoi`, `atoi_safe`, `atoi_safe2`, `itoa`), `strtools` (bounded copies, searching, `split`, `strtrim`), `bytebuf` (byte-buffer operations), `linkedlist` (`LinkedList`), `fdprint` (`sprintf`, `printf` and stream writers) and `linereader` (`LineReader`, reading a stream line by line through a fixed buffer).

## What it does not do

The view is fixed: there is no zooming, panning or rotating in the window, and no command to save the image to a file.