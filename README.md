# lifegrid

This is Conway's Game of Life on a square grid with hard edges. A cell beyond
the border counts as dead. The board is shown in a pygame window, and you play
it with the mouse.

## Installing

```
pip install .
```

This also installs pygame.

## Running

```
lifegrid
```

You can also run `python -m lifegrid.game`. Both open a window whose title
summarises the controls.

- **Left click** on a cell switches it between live and dead. A click outside
  the board is ignored.
- **Right click** starts stepping through generations. A second right click
  pauses it.
- The game ends when a new generation has no live cells, or when it is the
  same as the generation before it. Stepping then stops and the title changes
  to `GAME OVER | LCM/RCM - START`.
- After the game ends, clicking with any button clears the board and starts a
  new game.
- Closing the window quits.

## Options

Each option is one word of the form `key:value`. Case does not matter.

| Option | Short form | Default | Meaning |
|--------|------------|---------|---------|
| `size:N` | `-s:N` | 20 | Number of cells on each side of the board (at least 1) |
| `scale:N` | `-c:N` | 20 | Side of each cell in pixels (at least 1) |
| `delay:N` | `-d:N` | 1000 | Time between generations in milliseconds (at least 0) |
| `help` | `-h` | | Print a summary of the options, then carry on |

Only the leading integer of a value is read, so `-s:30px` means 30. A value
that does not start with an integer, or that is below the minimum, raises
`ValueError`. Keys the program does not recognise are ignored.

For example:

```
lifegrid size:40 scale:15 -d:250
```

## Using it from Python

You do not need a window for the game logic.

- `lifegrid.setting.parse_args(argv)` turns a list of words into a frozen
  `Settings(size, scale, delay)`. `lifegrid.setting.usage()` returns the help
  text.
- `lifegrid.point.Cell` is either `DEAD` or `LIVE`. `Cell.toggled()` returns
  the other state.
- `lifegrid.point.Point(x, y)` is a grid coordinate. The default `Point()` and
  any negative coordinate stand for "off the grid".
  - `up()`, `down()`, `left()` and `right()` step one cell.
  - `neighbours()` gives the eight surrounding points.
  - `inside(limit)` tests whether the point lies on a board of that size.
- `lifegrid.board.Board(size)` holds the grid, row by row.
  - Cell access: `get`, `set`, `toggle`, `fill`, `load` and `equals`.
  - `live_neighbours(point)` counts the live cells around a point.
  - `next_generation()` returns the next generation as a list of cells and
    leaves the board unchanged.
  - Accessing a point off the board raises `IndexError`.
- `lifegrid.board.is_empty(cells)` tells whether no cell is live.
- `lifegrid.frame` builds the cell tiles as 24-bit BMP data: `bmp_size`,
  `build_bmp` and `invert_bmp`. It also provides the `Frame` window class.
- `lifegrid.game.Game(settings, frame=None)` drives the window. It has
  `click`, `toggle_running`, `tick`, `reset` and `play`. You can pass any
  object with `Frame`'s drawing methods as `frame`.

```python
from lifegrid.board import Board
from lifegrid.point import Cell, Point

board = Board(5)
for x in (1, 2, 3):
    board.set(Point(x, 2), Cell.LIVE)
board.load(board.next_generation())   # the blinker turns vertical
```

## What it does not do

- The grid does not wrap around at the edges.
- Patterns cannot be saved or loaded from files.
- The rules are fixed: a dead cell with three live neighbours comes alive, and
  a live cell with two or three live neighbours survives.

## Tests

```
pip install .[test]
pytest
```