"""The player-controlled character."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from canchagame.items import (
    TILE_HEIGHT,
    TILE_WIDTH,
    Ability,
    Block,
    Canvas,
    Element,
    Rect,
)

PLAYER_WIDTH = 70
PLAYER_HEIGHT = 128
ZOOM = 0.4
STEP = 10

Grid = list[list[Block]]


class Direction(IntEnum):
    NONE = 0
    DOWN = 1
    UP = 2
    LEFT = 3
    RIGHT = 4


_WALKING = {
    Direction.UP: (0, 0, -STEP),
    Direction.DOWN: (2, 0, STEP),
    Direction.LEFT: (3, -STEP, 0),
    Direction.RIGHT: (1, STEP, 0),
}

_IDLE_FRAMES = {
    Direction.DOWN: (0, 2),
    Direction.UP: (0, 0),
    Direction.LEFT: (1, 3),
    Direction.RIGHT: (1, 3),
}


class Player:
    """Position, movement and sprite frame of the player."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self.dx = 0
        self.dy = 0
        self.last_key = Direction.DOWN
        self.direction = Direction.NONE
        self.frame_x = 0
        self.frame_y = 2
        self.abilities: set[Ability] = set()
        self.vertical_limit = Rect()
        self.horizontal_limit = Rect()

    def anchor(self) -> tuple[int, int]:
        """Point where a bomb dropped by the player is placed."""
        return int(self.x + 1 * ZOOM), int(self.y + 20 * ZOOM + self.dy)

    def check_limits(self, grid: Grid) -> None:
        """Cancel movement that would run into a wall or a breakable block."""
        for i, row in enumerate(grid):
            for j, block in enumerate(row):
                if block.kind not in (Element.WALL, Element.BREAKABLE):
                    continue
                cell = Rect(j * TILE_WIDTH, i * TILE_HEIGHT, TILE_WIDTH, TILE_HEIGHT)
                if self.vertical_limit.intersects(cell):
                    self.dy = 0
                if self.horizontal_limit.intersects(cell):
                    self.dx = 0

    def draw(self, canvas: Canvas, image: Any, grid: Grid) -> None:
        """Check collisions, draw the current frame and advance the position."""
        width = int((PLAYER_WIDTH - 10) * ZOOM)
        height = int((PLAYER_HEIGHT - 20) * ZOOM)
        self.horizontal_limit = Rect(
            int(self.x + 2 * ZOOM + self.dx), int(self.y + 15 * ZOOM), width, height
        )
        self.vertical_limit = Rect(
            int(self.x + 2 * ZOOM), int(self.y + 15 * ZOOM + self.dy), width, height
        )
        self.check_limits(grid)

        source = Rect(
            self.frame_x * PLAYER_WIDTH, self.frame_y * PLAYER_HEIGHT, PLAYER_WIDTH, PLAYER_HEIGHT
        )
        dest = Rect(self.x, self.y, int(PLAYER_WIDTH * ZOOM), int(PLAYER_HEIGHT * ZOOM))
        canvas.draw_image(image, dest, source)
        self.x += self.dx
        self.y += self.dy

    def move(self, canvas: Canvas, image: Any, grid: Grid) -> None:
        """Apply the current direction to speed and frame, then draw."""
        if self.direction in _WALKING:
            self.frame_y, self.dx, self.dy = _WALKING[self.direction]
            self.frame_x = self.frame_x + 1 if 0 <= self.frame_x < 3 else 0
            self.last_key = self.direction
        else:
            self.dx = 0
            self.dy = 0
            if self.last_key in _IDLE_FRAMES:
                self.frame_x, self.frame_y = _IDLE_FRAMES[self.last_key]
        self.draw(canvas, image, grid)