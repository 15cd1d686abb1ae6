"""Animate Game of Life boards in a text terminal."""

import argparse
import itertools
import subprocess
import sys
import time
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from lifesim.lifegrid import LifeGrid
from lifesim.torus import new_grid, render_blocks, update_grid

Coords = tuple[tuple[int, int], ...]

GLIDER: Coords = ((1, 0), (2, 1), (0, 2), (1, 2), (2, 2))

GOSPER_GUN: Coords = (
    (1, 5), (1, 6), (2, 5), (2, 6),
    (11, 5), (11, 6), (11, 7),
    (12, 4), (12, 8),
    (13, 3), (13, 9),
    (14, 3), (14, 9),
    (15, 6),
    (16, 4), (16, 8),
    (17, 5), (17, 6), (17, 7),
    (18, 6),
    (21, 3), (21, 4), (21, 5),
    (22, 3), (22, 4), (22, 5),
    (23, 2), (23, 6),
    (25, 1), (25, 2), (25, 6), (25, 7),
)

R_PENTOMINO: Coords = ((10, 10), (11, 10), (12, 10), (10, 11), (11, 9))

PULSAR: Coords = (
    (2, 4), (2, 5), (2, 6), (2, 10), (2, 11), (2, 12),
    (4, 2), (4, 7), (4, 9), (4, 14),
    (5, 2), (5, 7), (5, 9), (5, 14),
    (6, 2), (6, 7), (6, 9), (6, 14),
    (7, 4), (7, 5), (7, 6), (7, 10), (7, 11), (7, 12),
    (9, 4), (9, 5), (9, 6), (9, 10), (9, 11), (9, 12),
    (10, 2), (10, 7), (10, 9), (10, 14),
    (11, 2), (11, 7), (11, 9), (11, 14),
    (12, 2), (12, 7), (12, 9), (12, 14),
    (14, 4), (14, 5), (14, 6), (14, 10), (14, 11), (14, 12),
)

PATTERNS: dict[str, Coords] = {
    "glider": GLIDER,
    "gosper": GOSPER_GUN,
    "r-pentomino": R_PENTOMINO,
    "pulsar": PULSAR,
}

_ANSI_CLEAR = "\033[H\033[2J"


def translate(cells: Iterable[tuple[int, int]], dx: int, dy: int) -> Coords:
    """Shift every (x, y) coordinate by (dx, dy)."""
    return tuple((x + dx, y + dy) for x, y in cells)


@dataclass(frozen=True)
class Preset:
    """A board size, a starting pattern, a drawing style and a frame delay."""

    style: str
    width: int
    height: int
    cells: Coords
    delay: float = 0.2


PRESETS: dict[str, Preset] = {
    "gun": Preset("grid", 50, 30, GOSPER_GUN),
    "small-gun": Preset("grid", 30, 20, GOSPER_GUN),
    "glider": Preset("blocks", 50, 20, translate(GLIDER, 1, 1)),
}


def clear_screen() -> None:
    """Clear the terminal, falling back to an escape sequence if no clear command exists."""
    command = ["cls"] if sys.platform.startswith("win") else ["clear"]
    try:
        subprocess.run(command, check=False, shell=sys.platform.startswith("win"))
    except (FileNotFoundError, OSError):
        sys.stdout.write(_ANSI_CLEAR)
        sys.stdout.flush()


def animate(frames: Iterable[str], delay: float = 0.2, clear: bool = True) -> int:
    """Show each frame in turn, pausing delay seconds after each; return how many were shown."""
    if delay < 0:
        raise ValueError(f"delay must not be negative: {delay}")
    shown = 0
    for frame in frames:
        if clear:
            clear_screen()
        sys.stdout.write(frame)
        sys.stdout.flush()
        shown += 1
        if delay:
            time.sleep(delay)
    return shown


def _grid_frames(width: int, height: int, cells: Coords) -> Iterator[str]:
    grid = LifeGrid(width, height)
    grid.set_initial_alive(cells)
    while True:
        yield grid.render()
        grid.step()


def _block_frames(width: int, height: int, cells: Coords) -> Iterator[str]:
    grid = new_grid(height, width)
    for x, y in cells:
        if 0 <= x < width and 0 <= y < height:
            grid[y][x] = True
    while True:
        yield render_blocks(grid)
        grid = update_grid(grid)


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def _non_negative_float(text: str) -> float:
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lifesim-terminal", description="Run Conway's Game of Life in the terminal."
    )
    parser.add_argument("--preset", choices=sorted(PRESETS), default="gun")
    parser.add_argument("--pattern", choices=sorted(PATTERNS), help="starting pattern")
    parser.add_argument("--style", choices=("grid", "blocks"), help="drawing style")
    parser.add_argument("--width", type=_positive, help="board width in cells")
    parser.add_argument("--height", type=_positive, help="board height in cells")
    parser.add_argument("--delay", type=_non_negative_float, help="seconds between frames")
    parser.add_argument(
        "--generations", type=_non_negative_int, help="stop after this many frames"
    )
    parser.add_argument("--no-clear", action="store_true", help="do not clear between frames")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the terminal animation; return an exit status."""
    args = _parser().parse_args(argv)
    preset = PRESETS[args.preset]
    style = args.style or preset.style
    width = args.width or preset.width
    height = args.height or preset.height
    cells = PATTERNS[args.pattern] if args.pattern else preset.cells
    delay = preset.delay if args.delay is None else args.delay

    make_frames = _grid_frames if style == "grid" else _block_frames
    frames: Iterable[str] = make_frames(width, height, cells)
    if args.generations is not None:
        frames = itertools.islice(frames, args.generations)
    try:
        animate(frames, delay, not args.no_clear)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())