"""Game of Life on plain nested lists of booleans with wrapping edges."""

import random

_OFFSETS = tuple(
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
)

Grid = list[list[bool]]


def new_grid(rows: int, cols: int) -> Grid:
    """Return a rows x cols grid of dead cells."""
    if rows < 0 or cols < 0:
        raise ValueError(f"grid size must not be negative: {rows}x{cols}")
    return [[False] * cols for _ in range(rows)]


def count_neighbors(grid: Grid, x: int, y: int) -> int:
    """Count live neighbours of row x, column y, wrapping at the edges."""
    rows, cols = len(grid), len(grid[0])
    return sum(grid[(x + di) % rows][(y + dj) % cols] for di, dj in _OFFSETS)


def update_grid(grid: Grid) -> Grid:
    """Return the next generation of grid, leaving grid itself unchanged."""
    return [
        [
            count_neighbors(grid, i, j) in ((2, 3) if alive else (3,))
            for j, alive in enumerate(row)
        ]
        for i, row in enumerate(grid)
    ]


def random_grid(rows: int, cols: int, rng: random.Random | None = None) -> Grid:
    """Return a grid in which each cell is alive with a chance of one in five."""
    rng = rng or random.Random()
    grid = new_grid(rows, cols)
    for row in grid:
        for j in range(cols):
            row[j] = rng.randint(0, 4) == 0
    return grid


def render_blocks(grid: Grid) -> str:
    """Draw live cells as blocks and dead cells as spaces, one line per row."""
    return "".join("".join("■" if c else " " for c in row) + "\n" for row in grid)