"""Forest-fire cellular automaton with tree growth and lightning."""

import random
from enum import IntEnum

TREE_GROWTH_PROB = 0.01
LIGHTNING_PROB = 6e-5
WIND_INFLUENCE = 0.8


class CellState(IntEnum):
    EMPTY = 0
    TREE = 1
    BURNING = 2


class Forest:
    """A width x height forest surrounded by a border of empty ground.

    Cells are addressed from the outside with zero-based (x, y); inside,
    the grid carries a one-cell empty border that fire cannot cross.
    """

    def __init__(
        self,
        width: int = 300,
        height: int = 300,
        growth_prob: float = TREE_GROWTH_PROB,
        lightning_prob: float = LIGHTNING_PROB,
        wind_influence: float = WIND_INFLUENCE,
        rng: random.Random | None = None,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"forest must not be empty: {width}x{height}")
        self.width = width
        self.height = height
        self.growth_prob = growth_prob
        self.lightning_prob = lightning_prob
        self.wind_influence = wind_influence
        self._rng = rng or random.Random()
        self._grid = [[CellState.EMPTY] * (height + 2) for _ in range(width + 2)]
        for i in range(1, width + 1):
            for j in range(1, height + 1):
                self._grid[i][j] = CellState.TREE

    def ignite_center(self) -> None:
        """Set the centre tree on fire."""
        self._grid[self.width // 2][self.height // 2] = CellState.BURNING

    def state(self, x: int, y: int) -> CellState:
        """Return the state of the cell at zero-based (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.width}x{self.height} forest")
        return self._grid[x + 1][y + 1]

    def _burning_neighbors(self, i: int, j: int) -> int:
        return sum(
            self._grid[i + di][j + dj] is CellState.BURNING
            for di in (-1, 0, 1)
            for dj in (-1, 0, 1)
            if (di, dj) != (0, 0)
        )

    def step(self) -> None:
        """Advance the forest by one generation."""
        grid = self._grid
        rand = self._rng.random
        new = [row[:] for row in grid]
        for i in range(1, self.width + 1):
            for j in range(1, self.height + 1):
                current = grid[i][j]
                if current is CellState.BURNING:
                    new[i][j] = CellState.EMPTY
                elif current is CellState.TREE:
                    if self._burning_neighbors(i, j) > 0:
                        new[i][j] = CellState.BURNING
                    elif grid[i - 1][j] is CellState.BURNING and rand() < self.wind_influence:
                        new[i][j] = CellState.BURNING
                    elif rand() < self.lightning_prob:
                        new[i][j] = CellState.BURNING
                elif rand() < self.growth_prob:
                    new[i][j] = CellState.TREE
        self._grid = new