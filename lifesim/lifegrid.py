"""A toroidal Game of Life board made of Cell objects."""

from collections.abc import Iterable

from lifesim.cell import Cell

_OFFSETS = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)

ALIVE_MARK = "■"


class LifeGrid:
    """A width x height board whose edges wrap around."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self._rows = [[Cell(x, y, False) for x in range(width)] for y in range(height)]

    def set_initial_alive(self, alive_cells: Iterable[tuple[int, int]]) -> None:
        """Bring the given (x, y) cells to life; coordinates off the board are ignored."""
        for x, y in alive_cells:
            if 0 <= x < self.width and 0 <= y < self.height:
                self._rows[y][x].alive = True

    def is_alive(self, x: int, y: int) -> bool:
        """Return whether the cell at (x, y) is alive."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} grid")
        return self._rows[y][x].alive

    def count_live_neighbors(self, x: int, y: int) -> int:
        """Count the live cells among the eight neighbours, wrapping at the edges."""
        return sum(
            self._rows[(y + dy) % self.height][(x + dx) % self.width].alive
            for dx, dy in _OFFSETS
        )

    def step(self) -> None:
        """Advance the board by one generation."""
        cells = [cell for row in self._rows for cell in row]
        for cell in cells:
            cell.calculate_next_state(self.count_live_neighbors(cell.x, cell.y))
        for cell in cells:
            cell.update()

    def render(self) -> str:
        """Draw the board as text with a line grid around every cell."""
        separator = "+" + "---+" * self.width
        lines = [separator]
        for row in self._rows:
            lines.append(
                "|" + "".join(f" {ALIVE_MARK if c.alive else ' '} |" for c in row)
            )
            lines.append(separator)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.render()