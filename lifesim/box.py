"""Game of Life board whose cells carry their on-screen geometry."""

import random
from dataclasses import dataclass


@dataclass
class BoxCell:
    """A cell's top-left corner, size and value (0 dead, 1 alive)."""

    x: float
    y: float
    width: float
    height: float
    value: int = 0


def _c_remainder(a: int, n: int) -> int:
    """Remainder that keeps the sign of the dividend."""
    r = abs(a) % n
    return -r if a < 0 else r


class Box:
    """A window-sized grid of BoxCell objects that evolves by Conway's rules."""

    def __init__(self, row_num: int, col_num: int, win_width: int, win_height: int) -> None:
        if row_num <= 0 or col_num <= 0:
            raise ValueError(f"grid must have rows and columns: {row_num}x{col_num}")
        self.row_num = row_num
        self.col_num = col_num
        self.window_width = win_width
        self.window_height = win_height
        cell_width = win_width / row_num
        cell_height = win_height / col_num
        self.cells = [
            [
                BoxCell(row * cell_width, col * cell_height, cell_width, cell_height)
                for col in range(col_num)
            ]
            for row in range(row_num)
        ]

    def get_cell(self, row: int, col: int) -> BoxCell:
        """Return the cell at row, col with out-of-range indices wrapped.

        A negative index lands on ``index % n + n - 1`` (remainder with the
        sign of the index), so -1 maps to the second-to-last row or column.
        """
        if row < 0:
            row = _c_remainder(row, self.row_num) + self.row_num - 1
        if row >= self.row_num:
            row %= self.row_num
        if col < 0:
            col = _c_remainder(col, self.col_num) + self.col_num - 1
        if col >= self.col_num:
            col %= self.col_num
        return self.cells[row][col]

    def get_all_cells(self) -> list[BoxCell]:
        """Return every cell, row by row."""
        return [cell for row in self.cells for cell in row]

    def flush(self) -> list[BoxCell]:
        """Advance one generation and return the cells whose value changed."""
        to_change = []
        for row in range(self.row_num):
            for col in range(self.col_num):
                surviving = sum(
                    self.get_cell(row + dr, col + dc).value
                    for dr in (-1, 0, 1)
                    for dc in (-1, 0, 1)
                    if (dr, dc) != (0, 0)
                )
                if self.cells[row][col].value == 1:
                    if surviving < 2 or surviving > 3:
                        to_change.append(self.cells[row][col])
                elif surviving == 3:
                    to_change.append(self.cells[row][col])
        for cell in to_change:
            cell.value = 0 if cell.value == 1 else 1
        return to_change

    def seed_random(self, count: int, rng: random.Random | None = None) -> None:
        """Set count randomly chosen cells alive; a cell may be picked twice."""
        rng = rng or random.Random()
        for _ in range(count):
            row = rng.randint(0, self.row_num - 1)
            col = rng.randint(0, self.col_num - 1)
            self.cells[row][col].value = 1