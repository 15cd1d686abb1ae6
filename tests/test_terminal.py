from unittest import mock

import pytest

from lifesim.lifegrid import LifeGrid
from lifesim.terminal import (
    GLIDER,
    GOSPER_GUN,
    PULSAR,
    R_PENTOMINO,
    animate,
    clear_screen,
    main,
    translate,
)


def test_animate_writes_frames_in_order_and_counts(capsys):
    shown = animate(iter(["one\n", "two\n", "three\n"]), 0, False)
    assert shown == 3
    assert capsys.readouterr().out == "one\ntwo\nthree\n"


def test_animate_clears_before_every_frame(capsys):
    with mock.patch("lifesim.terminal.subprocess.run") as run:
        shown = animate(["a", "b"], 0, True)
    assert shown == 2
    assert run.call_count == 2
    assert capsys.readouterr().out == "ab"


def test_animate_rejects_negative_delay():
    with pytest.raises(ValueError):
        animate(["x"], -1, False)


def test_animate_empty_shows_nothing(capsys):
    assert animate([], 0, False) == 0
    assert capsys.readouterr().out == ""


def test_clear_screen_falls_back_to_escape_sequence(capsys):
    with mock.patch("lifesim.terminal.subprocess.run", side_effect=FileNotFoundError):
        clear_screen()
    assert capsys.readouterr().out == "\033[H\033[2J"


def test_translate_shifts_coordinates():
    assert translate(GLIDER, 1, 1) == ((2, 1), (3, 2), (1, 3), (2, 3), (3, 3))


def test_main_default_preset_draws_gosper_gun(capsys):
    assert main(["--generations", "1", "--no-clear", "--delay", "0"]) == 0
    out = capsys.readouterr().out
    grid = LifeGrid(50, 30)
    grid.set_initial_alive(GOSPER_GUN)
    assert out == grid.render()
    assert out.count("■") == len(set(GOSPER_GUN))
    assert len(out.splitlines()) == 2 * 30 + 1


def test_main_second_frame_is_next_generation(capsys):
    main(["--generations", "2", "--no-clear", "--delay", "0", "--preset", "small-gun"])
    out = capsys.readouterr().out
    grid = LifeGrid(30, 20)
    grid.set_initial_alive(GOSPER_GUN)
    first = grid.render()
    grid.step()
    assert out == first + grid.render()


def test_main_glider_preset_uses_blocks(capsys):
    main(["--preset", "glider", "--generations", "2", "--no-clear", "--delay", "0"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2 * 20
    assert all(len(line) == 50 for line in lines)
    first, second = lines[:20], lines[20:]
    assert sum(line.count("■") for line in first) == len(GLIDER)
    assert sum(line.count("■") for line in second) == len(GLIDER)
    assert first != second


def test_main_zero_generations_prints_nothing(capsys):
    assert main(["--generations", "0", "--no-clear"]) == 0
    assert capsys.readouterr().out == ""


def test_main_pattern_and_size_override(capsys):
    main(
        [
            "--pattern", "r-pentomino", "--width", "20", "--height", "15",
            "--generations", "1", "--no-clear", "--delay", "0",
        ]
    )
    out = capsys.readouterr().out
    grid = LifeGrid(20, 15)
    grid.set_initial_alive(R_PENTOMINO)
    assert out == grid.render()


@pytest.mark.parametrize(
    "argv",
    [
        ["--preset", "nonexistent"],
        ["--width", "0"],
        ["--generations", "-1"],
        ["--delay", "-0.5"],
    ],
)
def test_main_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit):
        main(argv)


def test_main_interrupt_returns_130():
    with mock.patch("lifesim.terminal.subprocess.run", side_effect=KeyboardInterrupt):
        assert main(["--delay", "0"]) == 130


def test_pulsar_has_period_three():
    grid = LifeGrid(17, 17)
    grid.set_initial_alive(PULSAR)
    start = grid.render()
    grid.step()
    assert grid.render() != start
    grid.step()
    grid.step()
    assert grid.render() == start


def test_gosper_pattern_option_draws_gun(capsys):
    main(
        [
            "--pattern", "gosper", "--width", "50", "--height", "30",
            "--generations", "1", "--no-clear", "--delay", "0",
        ]
    )
    out = capsys.readouterr().out
    grid = LifeGrid(50, 30)
    grid.set_initial_alive(GOSPER_GUN)
    assert out == grid.render()