"""Board elements, abilities and the minimal drawing primitives used by the game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

ROWS = 13
COLUMNS = 13
TILE_WIDTH = 64
TILE_HEIGHT = 64
ABILITY_COUNT = 7


class Element(IntEnum):
    """Kind of content a board cell holds."""

    FLOOR = 0
    WALL = 1
    BREAKABLE = 2
    FREE = 3
    OBSTACLE = 4
    POWER = 5
    PLAYER = 6
    BOMB = 7
    ENEMY = 8


class Ability(IntEnum):
    """Abilities a block may hide or a player may carry."""

    FIRE = 0
    BOMBS = 1
    PUNCH = 2
    RESISTANCE = 3
    DEATH = 4
    SPEED = 5
    STOP = 6


@dataclass(frozen=True)
class Rect:
    """Axis-aligned integer rectangle."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def intersects(self, other: Rect) -> bool:
        """Return True when the interiors of both rectangles overlap."""
        return (
            other.x < self.x + self.width
            and self.x < other.x + other.width
            and other.y < self.y + self.height
            and self.y < other.y + other.height
        )


@dataclass(frozen=True)
class DrawCall:
    """One recorded image draw."""

    image: Any
    dest: Rect
    source: Rect | None


class Canvas:
    """Drawing surface that records every image drawn on it, in order."""

    def __init__(self) -> None:
        self.calls: list[DrawCall] = []

    def draw_image(self, image: Any, dest: Rect, source: Rect | None = None) -> None:
        """Draw ``image`` (or the ``source`` part of it) into ``dest``."""
        self.calls.append(DrawCall(image, dest, source))


@dataclass
class Block:
    """A single board cell."""

    row: int
    column: int
    kind: Element
    appearance: str
    resistance: int
    abilities: set[Ability] = field(default_factory=set)

    def add_ability(self, ability: Ability) -> None:
        self.abilities.add(Ability(ability))

    def remove_ability(self, ability: Ability) -> None:
        self.abilities.discard(Ability(ability))

    def has_ability(self, ability: Ability) -> bool:
        return Ability(ability) in self.abilities