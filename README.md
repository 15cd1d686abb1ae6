# lifesim

Small cellular-automaton simulations:

- Conway's Game of Life on a wrap-around (toroidal) grid, drawn in the
  terminal either with `+---+` grid lines around every cell or as plain
  `■` blocks.
- The same rules in a pygame window, with grid lines, or with mouse
  toggling, pause and random reseeding.
- A forest-fire model in which trees grow, burn and are struck by lightning.

## Installing

```
pip install .
```

The windowed programs use `pygame`, which is installed with the package.
To run the tests:

```
pip install ".[test]"
pytest
```

## Running in the terminal

```
lifesim
```

This animates a Gosper glider gun on a 50x30 board, clearing the screen
before every frame and waiting 0.2 seconds between frames. Stop it with
Ctrl+C. Options:

- `--preset {glider,gun,small-gun}`: `gun` (default, 50x30, grid lines),
  `small-gun` (30x20, grid lines), `glider` (50x20, blocks).
- `--pattern {glider,gosper,pulsar,r-pentomino}`: replace the preset's
  starting pattern.
- `--style {grid,blocks}`: drawing style.
- `--width N`, `--height N`: board size in cells (positive).
- `--delay SECONDS`: pause between frames (not negative).
- `--generations N`: stop after N frames.
- `--no-clear`: do not clear the screen between frames.

The screen is cleared with the system `clear` command (`cls` on Windows),
or with an ANSI escape sequence when that command cannot be started.

## Running in a window

```
lifesim-gui [grid|random|box|forest|window]
```

- `grid` (default): an R-pentomino on a 60x40 board with grid lines, ten
  generations a second. Escape or closing the window quits.
- `random`: an 80x60 board where each cell starts alive with a chance of
  one in five. Space pauses, `R` reseeds, a mouse click toggles a cell.
- `box`: a 160x160 board with 4800 random cells set alive, one generation
  a second; space pauses. Only the cells that changed are redrawn.
- `forest`: a 300x300 forest set alight near the centre, five steps a
  second.
- `window`: an 800x600 window showing a red square.

If no window can be opened the command prints an error and exits with
status 1.

## Using it as a library

The Game of Life grid, with cells kept as `Cell` objects:

```python
from lifesim.lifegrid import LifeGrid

grid = LifeGrid(50, 30)
grid.set_initial_alive([(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)])  # glider
grid.step()
print(grid.is_alive(2, 2))
print(grid.count_live_neighbors(1, 1))
print(grid.render())
```

Coordinates are `(x, y)`. Points outside the grid are ignored by
`set_initial_alive`; `is_alive` raises `IndexError` for them. Neighbour
counting wraps around the edges.

The same rules on a plain list-of-lists grid of booleans, indexed
`grid[row][column]`:

```python
import random
from lifesim.torus import new_grid, random_grid, update_grid, render_blocks

grid = random_grid(20, 50, random.Random(1))
grid = update_grid(grid)      # returns a new grid
print(render_blocks(grid))
```

The box form of the rules, where each `BoxCell` carries its position and
size in window pixels and `flush` returns the cells that changed:

```python
import random
from lifesim.box import Box

box = Box(160, 160, 800, 800)
box.seed_random(4800, random.Random(1))
changed = box.flush()
```

`Box.get_cell` wraps indices past the end to the start, but a negative
index `i` lands on `i % n + n - 1` with the remainder taking the sign of
`i`, so `-1` maps to the second-to-last row or column. `flush` uses
`get_cell` for neighbours, so its edges behave the same way.

The forest-fire model:

```python
import random
from lifesim.forest import CellState, Forest

forest = Forest(
    width=300,
    height=300,
    growth_prob=0.01,
    lightning_prob=6e-5,
    wind_influence=0.8,
    rng=random.Random(1),
)
forest.ignite_center()
print(forest.state(149, 149) is CellState.BURNING)
forest.step()
print(forest.state(149, 149) is CellState.EMPTY)
```

The forest starts full of trees inside a border of empty ground that fire
cannot cross; `state(x, y)` takes zero-based coordinates and raises
`IndexError` outside the forest. On each step a burning tree becomes empty
land, a tree next to a fire catches fire, lightning can ignite any tree,
and new trees grow on empty land.