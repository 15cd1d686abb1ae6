"""A single cell of a Game of Life board."""

from dataclasses import dataclass, field


@dataclass
class Cell:
    """A cell that knows its position, its state and its pending next state."""

    x: int = 0
    y: int = 0
    alive: bool = False
    _next_state: bool = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._next_state = self.alive

    def calculate_next_state(self, live_neighbors: int) -> None:
        """Work out the next generation's state from the live neighbour count."""
        if self.alive:
            self._next_state = live_neighbors in (2, 3)
        else:
            self._next_state = live_neighbors == 3

    def update(self) -> None:
        """Move to the state computed by the last calculate_next_state call."""
        self.alive = self._next_state