# canchagame

Game logic for a grid-based bomber arcade game. It has a 13 × 13 playing field of walls, breakable blocks and open floor. A player walks across the field and stops at solid blocks. Enemies patrol back and forth along the rows.

All drawing goes through an object with a `draw_image(image, dest, source=None)` method. `dest` and `source` are `Rect` values. The built-in `canchagame.items.Canvas` records every call in its `calls` list as `DrawCall` entries. This lets the logic run headless, and any object with the same method can stand in for a real rendering surface.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Overview

### `canchagame.items`

- `Element` and `Ability` are integer enums.
- `Rect` is a frozen rectangle. `Rect.intersects(other)` is true when the interiors of the two rectangles overlap.
- `Canvas` and `DrawCall` record drawing calls.
- `Block` is one board cell. It has these fields:
  - `row`
  - `column`
  - `kind`
  - `appearance`
  - `resistance`
  - `abilities`

  It also has `add_ability`, `remove_ability` and `has_ability`.
- Board constants:
  - `ROWS`
  - `COLUMNS`
  - `TILE_WIDTH`
  - `TILE_HEIGHT`
  - `ABILITY_COUNT`

### `canchagame.field`

`Field` holds the `grid`, a list of rows of `Block`.

- `define()` fills the whole grid with floor.
- `initialize(rng=None)` builds a level from an optional `random.Random`:
  - The border and every even/even cell become walls.
  - The cells around the two starting corners stay clear floor.
  - Every other cell is randomly either breakable or free.
- `render()` returns the grid as rows of element codes.
- `show()` writes the grid under a `Cancha: ` heading to standard output and returns that text.
- `paint_floor(canvas, floor_image)` draws floor and free cells.
- `paint_blocks(canvas, wall_image, breakable_image)` draws walls and breakable blocks.

### `canchagame.player`

`Direction` and `Player(x, y)`.

- `Player.move(canvas, image, grid)` sets the sprite frame and velocity for the current `direction`, then calls `draw`.
- `draw` builds the collision boxes and calls `check_limits(grid)`, which zeroes movement into walls or breakable blocks. It then draws the frame and advances the position.
- `anchor()` returns the point where a bomb would be dropped.

### `canchagame.enemy`

- `find_spot(grid)` returns `(row, column)` of a free cell in the lower two thirds of the field, or `None`. It prefers free cells with free neighbours.
- An `Enemy` places itself with `find_spot` the first time it is drawn. It then walks horizontally and reverses at walls and breakable blocks.
- `Enemy.animate()` cycles its sprite frame.
- `EnemyCollection.spawn(delay=1.0)` waits `delay` seconds, then adds and returns a new enemy.
- `EnemyCollection.draw(canvas, image, grid)` draws and animates every enemy.

## Example

```python
import random

from canchagame.enemy import EnemyCollection
from canchagame.field import Field
from canchagame.items import Canvas
from canchagame.player import Direction, Player

field = Field()
field.initialize(random.Random(1))
field.show()

canvas = Canvas()
field.paint_floor(canvas, "floor.png")
field.paint_blocks(canvas, "wall.png", "breakable.png")

player = Player(64, 64)
player.direction = Direction.DOWN
player.move(canvas, "player.png", field.grid)

enemies = EnemyCollection()
enemies.spawn(delay=0)
enemies.draw(canvas, "enemy.png", field.grid)

for call in canvas.calls[-2:]:
    print(call.image, call.dest)
```

## What the package does not do

- It opens no window and reads no keyboard. There is no game loop: the caller sets `Player.direction` and calls `move` and `draw` once per frame.
- It has no bombs, explosions or collectible abilities on the field. `Block` and `Player` can hold abilities, but nothing awards them.
- Enemies carry a `state`, but nothing in the package eliminates them, and there is no collision between the player and enemies.