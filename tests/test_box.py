import random

import pytest

from lifesim.box import Box, BoxCell


def alive_set(box):
    return {
        (r, c)
        for r, row in enumerate(box.cells)
        for c, cell in enumerate(row)
        if cell.value == 1
    }


def test_geometry_is_consistent():
    box = Box(4, 5, 800, 600)
    for r, row in enumerate(box.cells):
        for c, cell in enumerate(row):
            assert cell.width == 800 / 4
            assert cell.height == 600 / 5
            assert cell.x == r * cell.width
            assert cell.y == c * cell.height
            assert cell.value == 0


def test_zero_rows_rejected():
    with pytest.raises(ValueError):
        Box(0, 3, 100, 100)


def test_get_cell_in_range():
    box = Box(6, 6, 60, 60)
    assert box.get_cell(2, 3) is box.cells[2][3]


def test_get_cell_wraps_past_end():
    box = Box(6, 7, 60, 70)
    assert box.get_cell(6, 7) is box.cells[0][0]
    assert box.get_cell(8, 3) is box.cells[2][3]


def test_get_cell_negative_index_rule():
    box = Box(6, 7, 60, 70)
    assert box.get_cell(-1, 0) is box.cells[box.row_num - 2][0]
    assert box.get_cell(0, -1) is box.cells[0][box.col_num - 2]
    assert box.get_cell(-6, -7) is box.cells[5][6]


def test_get_all_cells_row_major():
    box = Box(3, 4, 30, 40)
    cells = box.get_all_cells()
    assert len(cells) == 3 * 4
    assert cells[0] is box.cells[0][0]
    assert cells[4] is box.cells[1][0]
    assert cells[-1] is box.cells[2][3]


def test_block_is_still():
    box = Box(8, 8, 80, 80)
    block = {(3, 3), (3, 4), (4, 3), (4, 4)}
    for r, c in block:
        box.cells[r][c].value = 1
    assert box.flush() == []
    assert alive_set(box) == block


def test_blinker_flush_returns_changes():
    box = Box(9, 9, 90, 90)
    blinker = {(4, 3), (4, 4), (4, 5)}
    for r, c in blinker:
        box.cells[r][c].value = 1
    before = alive_set(box)
    changed = box.flush()
    after = alive_set(box)
    changed_ids = {id(cell) for cell in changed}
    flipped = {
        (r, c)
        for r in range(9)
        for c in range(9)
        if ((r, c) in before) != ((r, c) in after)
    }
    assert changed_ids == {id(box.cells[r][c]) for r, c in flipped}
    assert len(after) == len(blinker)
    box.flush()
    assert alive_set(box) == blinker


def test_lone_cell_dies():
    box = Box(6, 6, 60, 60)
    box.cells[3][3].value = 1
    changed = box.flush()
    assert changed == [box.cells[3][3]]
    assert alive_set(box) == set()


class _SequenceRng:
    def __init__(self, values):
        self.values = list(values)

    def randint(self, a, b):
        return self.values.pop(0)


def test_seed_random_uses_row_then_column():
    box = Box(5, 5, 50, 50)
    box.seed_random(2, _SequenceRng([1, 2, 3, 0]))
    assert alive_set(box) == {(1, 2), (3, 0)}


def test_seed_random_stays_in_range():
    box = Box(10, 12, 100, 120)
    box.seed_random(200, random.Random(3))
    cells = alive_set(box)
    assert 0 < len(cells) <= 200
    assert all(0 <= r < 10 and 0 <= c < 12 for r, c in cells)


def test_boxcell_defaults_dead():
    cell = BoxCell(1.0, 2.0, 3.0, 4.0)
    assert cell.value == 0