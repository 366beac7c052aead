import random

import pytest

from canchagame.field import Field
from canchagame.items import COLUMNS, ROWS, TILE_HEIGHT, TILE_WIDTH, Canvas, Element, Rect


@pytest.fixture
def field():
    f = Field()
    f.initialize(random.Random(7))
    return f


def _all_blocks(f):
    return [b for row in f.grid for b in row]


def test_define_fills_with_floor():
    f = Field()
    f.define()
    blocks = _all_blocks(f)
    assert len(f.grid) == ROWS
    assert all(len(row) == COLUMNS for row in f.grid)
    assert all(b.kind is Element.FLOOR and b.appearance == "bloque1.png" and b.resistance == 99 for b in blocks)


def test_border_is_walls(field):
    for i, row in enumerate(field.grid):
        for j, block in enumerate(row):
            if i in (0, ROWS - 1) or j in (0, COLUMNS - 1):
                assert block.kind is Element.WALL


def test_even_cells_are_walls(field):
    for i in range(0, ROWS, 2):
        for j in range(0, COLUMNS, 2):
            assert field.grid[i][j].kind is Element.WALL


@pytest.mark.parametrize(
    "cell",
    [(1, 1), (1, 2), (2, 1), (ROWS - 2, COLUMNS - 2), (ROWS - 3, COLUMNS - 2), (ROWS - 2, COLUMNS - 3)],
)
def test_start_cells_are_floor(field, cell):
    block = field.grid[cell[0]][cell[1]]
    assert block.kind is Element.FLOOR
    assert block.appearance == "piso1.png"
    assert block.resistance == 0


def test_random_cells_are_breakable_or_free(field):
    kinds = {b.kind for b in _all_blocks(field)}
    assert kinds <= {Element.WALL, Element.FLOOR, Element.BREAKABLE, Element.FREE}
    for b in _all_blocks(field):
        if b.kind is Element.BREAKABLE:
            assert (b.appearance, b.resistance) == ("rrompible1.png", 1)


def test_blocks_know_their_position(field):
    for i, row in enumerate(field.grid):
        for j, block in enumerate(row):
            assert (block.row, block.column) == (i, j)


def test_same_seed_same_board():
    a, b = Field(), Field()
    a.initialize(random.Random(3))
    b.initialize(random.Random(3))
    assert a.render() == b.render()


def test_render_has_one_line_per_row(field):
    lines = field.render().splitlines()
    assert len(lines) == ROWS
    assert all(len(line.split()) == COLUMNS for line in lines)


def test_show_prints_header(field, capsys):
    field.show()
    out = capsys.readouterr().out
    assert out.startswith("Cancha: ")
    assert field.render() in out


def test_paint_floor_draws_floor_and_free(field):
    canvas = Canvas()
    field.paint_floor(canvas, "piso")
    expected = [
        Rect(j * TILE_WIDTH, i * TILE_HEIGHT, TILE_WIDTH, TILE_HEIGHT)
        for i, row in enumerate(field.grid)
        for j, b in enumerate(row)
        if b.kind in (Element.FLOOR, Element.FREE)
    ]
    assert [c.dest for c in canvas.calls] == expected
    assert all(c.image == "piso" for c in canvas.calls)


def test_paint_blocks_picks_image_by_kind(field):
    canvas = Canvas()
    field.paint_blocks(canvas, "wall", "brick")
    for call in canvas.calls:
        block = field.grid[call.dest.y // TILE_HEIGHT][call.dest.x // TILE_WIDTH]
        assert call.image == ("wall" if block.kind is Element.WALL else "brick")
    solid = sum(b.kind in (Element.WALL, Element.BREAKABLE) for b in _all_blocks(field))
    assert len(canvas.calls) == solid