"""Windowed front ends for the simulations, drawn with pygame."""

import argparse
import sys
import time
from collections.abc import Sequence
from typing import Protocol

import pygame

from lifesim.box import Box, BoxCell
from lifesim.forest import CellState, Forest
from lifesim.lifegrid import LifeGrid
from lifesim.terminal import R_PENTOMINO
from lifesim.torus import Grid, random_grid, update_grid

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRID_LINE = (50, 50, 50)
GREEN = (0, 255, 0)
RED = (255, 0, 0)


class CellSource(Protocol):
    def is_alive(self, x: int, y: int) -> bool: ...


def _open_window(size: tuple[int, int], title: str) -> pygame.Surface:
    try:
        pygame.display.init()
    except pygame.error as exc:
        raise RuntimeError(str(exc)) from exc
    surface = pygame.display.set_mode(size)
    pygame.display.set_caption(title)
    return surface


class GridRenderer:
    """A window that draws a width x height board with grid lines."""

    def __init__(self, width: int, height: int, cell_size: int = 20) -> None:
        if width <= 0 or height <= 0 or cell_size <= 0:
            raise ValueError(
                f"width, height and cell size must be positive: {width}, {height}, {cell_size}"
            )
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.surface = _open_window(
            (width * cell_size, height * cell_size), "Conway's Game of Life"
        )

    def render(self, grid: CellSource) -> None:
        """Draw the grid lines and every live cell, then show the frame."""
        cs = self.cell_size
        right, bottom = self.width * cs, self.height * cs
        self.surface.fill(BLACK)
        for x in range(self.width + 1):
            pygame.draw.line(self.surface, GRID_LINE, (x * cs, 0), (x * cs, bottom))
        for y in range(self.height + 1):
            pygame.draw.line(self.surface, GRID_LINE, (0, y * cs), (right, y * cs))
        for y in range(self.height):
            for x in range(self.width):
                if grid.is_alive(x, y):
                    self.surface.fill(GREEN, (x * cs + 1, y * cs + 1, cs - 1, cs - 1))
        pygame.display.flip()

    def handle_events(self) -> bool:
        """Drain pending events; return False once the window should close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        return True

    def close(self) -> None:
        """Close the window."""
        pygame.display.quit()

    def __enter__(self) -> "GridRenderer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def mouse_to_cell(
    pos: tuple[int, int], cell_size: int, width: int, height: int
) -> tuple[int, int] | None:
    """Map a pixel position to (x, y) of the cell under it, or None if off the board."""
    mx, my = pos
    gx, gy = int(mx / cell_size), int(my / cell_size)
    if 0 <= gx < width and 0 <= gy < height:
        return gx, gy
    return None


def run_grid_window() -> None:
    """Show an R-pentomino evolving on a 60x40 board until the window is closed."""
    game = LifeGrid(60, 40)
    game.set_initial_alive(R_PENTOMINO)
    with GridRenderer(60, 40) as renderer:
        while renderer.handle_events():
            renderer.render(game)
            game.step()
            time.sleep(0.1)


def _draw_blocks(surface: pygame.Surface, grid: Grid, cell_size: int) -> None:
    surface.fill(BLACK)
    for y, row in enumerate(grid):
        for x, alive in enumerate(row):
            if alive:
                surface.fill(WHITE, (x * cell_size, y * cell_size, cell_size, cell_size))
    pygame.display.flip()


def run_random_life() -> None:
    """Random board: space pauses, R reseeds, a click toggles a cell."""
    win_width, win_height, cell_size = 800, 600, 10
    cols, rows = win_width // cell_size, win_height // cell_size
    update_interval = 200
    surface = _open_window((win_width, win_height), "Life Game")
    clock = pygame.time.Clock()
    grid = random_grid(rows, cols)
    paused = False
    last_update = 0
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_SPACE:
                        paused = not paused
                    elif event.key == pygame.K_r:
                        grid = random_grid(rows, cols)
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    cell = mouse_to_cell(event.pos, cell_size, cols, rows)
                    if cell is not None:
                        x, y = cell
                        grid[y][x] = not grid[y][x]
            now = pygame.time.get_ticks()
            if not paused and now - last_update > update_interval:
                grid = update_grid(grid)
                last_update = now
            _draw_blocks(surface, grid, cell_size)
            clock.tick(60)
    finally:
        pygame.display.quit()


def _draw_box_cells(surface: pygame.Surface, cells: list[BoxCell]) -> None:
    surface.fill(WHITE)
    for cell in cells:
        colour = WHITE if cell.value == 0 else BLACK
        surface.fill(colour, pygame.Rect(cell.x, cell.y, cell.width, cell.height))


def run_box() -> None:
    """A 160x160 board seeded with 4800 random cells; space pauses, one step a second."""
    win_size, cells_per_row, life_num = 800, 160, 4800
    box = Box(cells_per_row, cells_per_row, win_size, win_size)
    if life_num > 0:
        box.seed_random(life_num)
    surface = _open_window((win_size, win_size), "Cellular Automata")
    drawn = False
    changing = True
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                    changing = not changing
            if not drawn:
                drawn = True
                _draw_box_cells(surface, box.get_all_cells())
            elif changing:
                _draw_box_cells(surface, box.flush())
            pygame.display.flip()
            pygame.time.wait(1000)
    finally:
        pygame.display.quit()


def _draw_forest(surface: pygame.Surface, forest: Forest, scale: int = 2) -> None:
    surface.fill(BLACK)
    colours = {CellState.TREE: GREEN, CellState.BURNING: RED}
    for x in range(forest.width):
        for y in range(forest.height):
            colour = colours.get(forest.state(x, y))
            if colour is not None:
                surface.fill(colour, (x * scale, y * scale, scale, scale))
    pygame.display.flip()


def run_forest() -> None:
    """A 300x300 forest set alight in the centre, five steps a second."""
    forest = Forest(300, 300)
    forest.ignite_center()
    surface = _open_window((forest.width * 2, forest.height * 2), "Forest fire simulation")
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            forest.step()
            _draw_forest(surface, forest)
            time.sleep(0.2)
    finally:
        pygame.display.quit()


def run_window_demo() -> None:
    """Open an 800x600 window showing a red square until it is closed."""
    surface = _open_window((800, 600), "Window example")
    clock = pygame.time.Clock()
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            surface.fill(BLACK)
            surface.fill(RED, (300, 200, 200, 200))
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.display.quit()


_DEMOS = {
    "grid": run_grid_window,
    "random": run_random_life,
    "box": run_box,
    "forest": run_forest,
    "window": run_window_demo,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Start one of the windowed simulations; return an exit status."""
    parser = argparse.ArgumentParser(
        prog="lifesim-gui", description="Run a cellular automaton in a window."
    )
    parser.add_argument("demo", nargs="?", choices=sorted(_DEMOS), default="grid")
    args = parser.parse_args(argv)
    try:
        _DEMOS[args.demo]()
    except (pygame.error, RuntimeError) as exc:
        print(f"cannot open window: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())