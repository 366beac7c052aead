"""The game board: a grid of blocks with walls, breakable blocks and floor."""

from __future__ import annotations

import random
import sys
from typing import Any

from canchagame.items import (
    COLUMNS,
    ROWS,
    TILE_HEIGHT,
    TILE_WIDTH,
    Block,
    Canvas,
    Element,
    Rect,
)

Grid = list[list[Block]]


class Field:
    """Board of ROWS x COLUMNS blocks."""

    def __init__(self) -> None:
        self.grid: Grid = []

    def define(self) -> None:
        """Fill the whole board with plain floor blocks."""
        self.grid = [
            [Block(i, j, Element.FLOOR, "bloque1.png", 99) for j in range(COLUMNS)]
            for i in range(ROWS)
        ]

    def initialize(self, rng: random.Random | None = None) -> None:
        """Lay out walls, the two start corners and random breakable blocks."""
        rng = rng or random.Random()
        start_cells = {
            (1, 1), (1, 2), (2, 1),
            (ROWS - 2, COLUMNS - 2), (ROWS - 3, COLUMNS - 2), (ROWS - 2, COLUMNS - 3),
        }
        self.grid = [
            [self._initial_block(i, j, start_cells, rng) for j in range(COLUMNS)]
            for i in range(ROWS)
        ]

    @staticmethod
    def _initial_block(i: int, j: int, start_cells: set[tuple[int, int]], rng: random.Random) -> Block:
        on_border = i in (0, ROWS - 1) or j in (0, COLUMNS - 1)
        if on_border or (i % 2 == 0 and j % 2 == 0):
            return Block(i, j, Element.WALL, "bloque1.png", 99)
        if (i, j) in start_cells:
            return Block(i, j, Element.FLOOR, "piso1.png", 0)
        if rng.randrange(2) == 0:
            return Block(i, j, Element.BREAKABLE, "rrompible1.png", 1)
        return Block(i, j, Element.FREE, "piso1.png", 0)

    def render(self) -> str:
        """Return the board as text, one line per row of element codes."""
        return "\n".join("  ".join(str(int(b.kind)) for b in row) for row in self.grid)

    def show(self) -> str:
        """Write the board with its heading to standard output and return that text."""
        lines = ["Cancha: "]
        body = self.render()
        if body:
            lines.append(body)
        text = "\n".join(lines) + "\n"
        sys.stdout.write(text)
        return text

    def _cells(self):
        for i, row in enumerate(self.grid):
            for j, block in enumerate(row):
                yield Rect(j * TILE_WIDTH, i * TILE_HEIGHT, TILE_WIDTH, TILE_HEIGHT), block

    def paint_floor(self, canvas: Canvas, floor_image: Any) -> None:
        """Draw the floor image on every floor or free cell."""
        for dest, block in self._cells():
            if block.kind in (Element.FLOOR, Element.FREE):
                canvas.draw_image(floor_image, dest)

    def paint_blocks(self, canvas: Canvas, wall_image: Any, breakable_image: Any) -> None:
        """Draw walls and breakable blocks."""
        for dest, block in self._cells():
            if block.kind is Element.WALL:
                canvas.draw_image(wall_image, dest)
            elif block.kind is Element.BREAKABLE:
                canvas.draw_image(breakable_image, dest)