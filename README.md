# fildefer

`fildefer` opens a height map in a window and draws it as a wireframe.
Each grid point is joined to its right and lower neighbours, so the map
appears as a mesh that can be viewed through several projections.

## Map files

A map is a plain text file with the `.fdf` extension. Each line is one row
of the grid, and each space-separated field is the height of one point:

```
0 0 0 0 0
0 5 5 5 0
0 5 9 5 0
0 5 5 5 0
0 0 0 0 0
```

- The number of fields on the first line sets the width of the map. Later
  lines may carry more fields (the extra ones are ignored) but not fewer.
- Each field is read like C's `atoi`: an optional sign followed by digits;
  anything after the digits is ignored, and a field without digits counts
  as `0`.

The following are reported as errors: a path with no `.`, an extension other
than `.fdf`, a file that cannot be opened, an empty file, a directory, a map
whose first line has no points, and a line shorter than the first.

## Running

```
pip install .
fildefer path/to/map.fdf
fildefer --bonus path/to/map.fdf
```

Without `--bonus` the classic viewer opens a 960×540 window; with `--bonus`
the extended viewer opens a 1920×1080 window with the map drawn to the right
of a 300-pixel menu column. Exactly one map must be given. On any error a
usage message is written to standard error and the command exits with
status 1; it exits with status 0 once the window is closed or quit.

`fildefer --help` lists the options.

### Menu image

The window draws a menu image in its top-left corner, loaded from the
working directory: `./images/menu.png` for the classic viewer and
`./images/menu_bonus.png` with `--bonus`. These images are not part of the
package. If the file is missing, the viewer reports
`Menu initialization failed` and exits with status 1, so run the command
from a directory that holds an `images/` folder with these files.

## Keys

Classic viewer:

| Key         | Action                                      |
|-------------|---------------------------------------------|
| `Esc`, `Q`  | quit                                        |
| `I`         | isometric projection                        |
| `T`         | top view                                    |
| `1`–`4`     | colour schemes (icewindale, phandelver, strahd, avernus) |
| `Space`     | isometric projection and standard colours   |

Extended viewer (`--bonus`):

| Key                     | Action                                     |
|-------------------------|--------------------------------------------|
| `Esc`, `Q`              | quit                                       |
| `I`, `T`                | isometric projection, top view             |
| `Y`, `U`, `O`           | oblique, height-side and width-side views  |
| `W` `A` `S` `D`         | move the map by 25 pixels                  |
| `Up` / `Down`           | raise or flatten the relief by 0.2         |
| `-` / `=`               | zoom out / in                              |
| `Z` `X` / `C` `V` / `B` `N` | rotate around the x / y / z axis by 0.1 rad |
| `1`–`4`                 | gradient colour schemes                    |
| `R`                     | colours graded by height                   |
| `Space`                 | reset the camera                           |

In the extended viewer the wireframe stops being drawn once the zoom drops
below -19.

## Using it as a library

The parts of the viewer can be used without opening a window:

```python
from fildefer.camera import Camera, Mode, layout_for
from fildefer.canvas import Canvas
from fildefer.controls import Key, handle_key
from fildefer.mapfile import load_map
from fildefer.renderer import Renderer

heightmap = load_map("map.fdf")
layout = layout_for(Mode.CLASSIC)
camera = Camera.default(Mode.CLASSIC)
canvas = Canvas(layout.width, layout.height)
renderer = Renderer(heightmap, camera, canvas, Mode.CLASSIC)

renderer.draw()                            # returns the number of pixels set
handle_key(camera, Key.T, Mode.CLASSIC)    # switch to the top view
renderer.draw()
pixels = canvas.to_rgba_bytes()            # R, G, B, A bytes, row by row
```

- `fildefer.mapfile`: `load_map`, `parse_heights`, `check_map_path`,
  `count_columns`, the `HeightMap` grid and the `MapError` exception.
- `fildefer.camera`: `Camera`, the `Mode`, `Scheme` and `View` enums and
  `layout_for`.
- `fildefer.projection`: `Segment` and the projection, rotation and
  translation functions.
- `fildefer.palette`: colour choice for the classic, gradient and
  height-graded schemes.
- `fildefer.canvas`: `Canvas` and `rgba`.
- `fildefer.renderer`: `Renderer` and the `dda` line walker.
- `fildefer.controls`: `Key`, `Outcome` and `handle_key`.
- `fildefer.app`: `Viewer`, which ties these together in a pygame window,
  and `main`, the command-line entry point.