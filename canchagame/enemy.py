"""Enemies that patrol the board left and right, and their collection."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Any

from canchagame.items import TILE_HEIGHT, TILE_WIDTH, Block, Canvas, Element, Rect

ENEMY_SPEED = 5
ENEMY_SCALE = 0.9
FRAME_COUNT = 5

Grid = list[list[Block]]


class EnemyState(IntEnum):
    ALIVE = 0
    ELIMINATED = 1


def _is_free(row: list[Block], j: int) -> bool:
    return 0 <= j < len(row) and row[j].kind is Element.FREE


def find_spot(grid: Grid) -> tuple[int, int] | None:
    """Return (row, column) of a free cell in the lower part of the board, or None."""
    start = len(grid) // 3
    rows = list(enumerate(grid))[start:]
    checks = [
        (rows, lambda r, j: _is_free(r, j - 1) and _is_free(r, j) and _is_free(r, j + 1)),
        (rows, lambda r, j: _is_free(r, j - 1) and _is_free(r, j)),
        (rows, lambda r, j: _is_free(r, j + 1) and _is_free(r, j)),
        (rows[:-1], lambda r, j: _is_free(r, j)),
    ]
    for candidates, fits in checks:
        for i, row in candidates:
            for j in range(1, len(row)):
                if fits(row, j):
                    return i, j
    return None


def _cell(value: int, size: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(value) // size
    return quotient if value >= 0 else -quotient


class Enemy:
    """An enemy that walks horizontally and turns at walls and breakable blocks."""

    def __init__(self) -> None:
        self.x = 0
        self.y = 0
        self.dx = ENEMY_SPEED
        self.dy = ENEMY_SPEED
        self.frame_x = 0
        self.frame_y = 18
        self.placed = False
        self.state = EnemyState.ALIVE

    def draw(self, canvas: Canvas, image: Any, grid: Grid) -> None:
        """Place on first use, draw the current frame and advance."""
        if not self.placed:
            spot = find_spot(grid)
            if spot is not None:
                row, column = spot
                self.x = column * TILE_WIDTH
                self.y = row * TILE_HEIGHT
            self.placed = True

        source = Rect(self.frame_x * TILE_WIDTH, self.frame_y * TILE_HEIGHT, TILE_WIDTH, TILE_HEIGHT)
        dest = Rect(self.x, self.y, int(TILE_WIDTH * ENEMY_SCALE), int(TILE_HEIGHT * ENEMY_SCALE))
        canvas.draw_image(image, dest, source)

        self.x += self.dx
        row = grid[_cell(self.y, TILE_HEIGHT)]
        ahead = row[_cell(self.x + TILE_WIDTH, TILE_WIDTH)].kind
        behind = row[_cell(self.x - 5, TILE_WIDTH)].kind
        if {ahead, behind} & {Element.BREAKABLE, Element.WALL}:
            self.dx = -self.dx

    def animate(self) -> None:
        """Step to the next animation frame, wrapping to the first."""
        if 0 <= self.frame_x < FRAME_COUNT:
            self.frame_x += 1
        if self.frame_x == FRAME_COUNT:
            self.frame_x = 0


class EnemyCollection:
    """All enemies on the board."""

    def __init__(self) -> None:
        self.enemies: list[Enemy] = []

    def spawn(self, delay: float = 1.0) -> Enemy:
        """Wait ``delay`` seconds, then add and return a new enemy."""
        time.sleep(delay)
        enemy = Enemy()
        self.enemies.append(enemy)
        return enemy

    def draw(self, canvas: Canvas, image: Any, grid: Grid) -> None:
        """Draw and animate every enemy."""
        for enemy in self.enemies:
            enemy.draw(canvas, image, grid)
            enemy.animate()