# snek

A small snake game. Steer the snake around a 20 × 20 grid, eat the food and
grow. The game ends when the snake would run into a wall or its own body; the
board is then reset and the title screen comes back.

## Installing

```
pip install .
```

This installs `pygame` along with the game.

## Playing

```
snek
```

A 1000 × 1000 window opens on the title screen.

| Key     | Action                                              |
|---------|-----------------------------------------------------|
| W A S D | Change direction. This also starts or resumes play. |
| P       | Pause                                               |
| Esc     | Quit                                                |

Closing the window also quits. The game advances one step roughly every
100 ms. A snake longer than one cell cannot turn straight back on itself.
The score, shown above the grid while playing, is the number of pieces of
food eaten.

### The font

All text is drawn with a TrueType font, by default
`assets/EvilVampire-woqBn.ttf` relative to the directory you start the game
from. That font is not shipped with the package. Point the game at any
TrueType font you have with `--font`:

```
snek --font /path/to/some-font.ttf
```

If the font cannot be loaded, or the window cannot be created, `snek`
prints a message and exits with status 1.

## Using the game logic

The rules are in `snek.board` and do not depend on any display:

```python
import random

from snek.board import Board, Direction, GridCoords

board = Board(grid_size=10, init_snake_coords=GridCoords(4, 4), rng=random.Random(1))
board.update_snake_dir(Direction.EAST)
if not board.update():
    board.reset()
print(board.snake.body, board.food_loc)
```

- `Board.update()` moves the snake one step and returns `False` when that
  step would leave the grid or hit the snake itself. Eating the food grows
  the snake by one cell and places new food on a free cell.
- `Board.update_snake_dir()` ignores a reversal when the snake is longer
  than one cell.
- `Board.will_collide(cell)` tells whether a cell is outside the grid or on
  the snake.
- `Board` raises `ValueError` for a grid size below 1 or a start cell outside
  the grid, and `RuntimeError` when there is no free cell left for food.

`snek.app.Game` wraps a board with the screen state (`State.TITLE`,
`State.PLAY`, `State.PAUSED`, `State.GAME_OVER`). `Game.handle_key(name)`
takes a key name such as `"w"` or `"escape"` and returns `False` when the
player wants to quit; `Game.tick()` advances one frame; `Game.score()` gives
the current score; `Game.draw(surface, font_factory)` renders a frame onto a
pygame surface. `Layout` holds the screen geometry of the grid.

## What it does not do

There is no high-score storage, no speed or grid-size setting on the command
line, and no sound. The game-over state shows the same screen as the title.

## Running the tests

```
pip install .[test]
pytest
```