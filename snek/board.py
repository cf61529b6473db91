"""Game logic for snake: grid coordinates, the snake itself and the board."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum

DEFAULT_GRID_SIZE = 20


@dataclass(frozen=True)
class GridCoords:
    """A cell on the game grid; (0, 0) is the top-left corner."""

    x: int = 0
    y: int = 0


# The centre of the default grid (the grid starts at 0, hence the -1).
DEFAULT_SNAKE_POS = GridCoords(DEFAULT_GRID_SIZE // 2 - 1, DEFAULT_GRID_SIZE // 2 - 1)


class Direction(IntEnum):
    """Directions numbered clockwise so a reversal is a difference of two."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


_STEPS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}


class Snake:
    """The snake: a body of cells whose last element is the head."""

    def __init__(self, head: GridCoords) -> None:
        self.head = head
        self.body: list[GridCoords] = [head]
        self.direction = Direction.NORTH

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, here: object) -> bool:
        return here in self.body

    def next_head_location(self) -> GridCoords:
        """Where the head would be after one step in the current direction."""
        dx, dy = _STEPS[self.direction]
        return GridCoords(self.head.x + dx, self.head.y + dy)

    def move(self, has_eaten_food: bool = False) -> None:
        """Advance one step; grow by one cell if food was eaten.

        Collisions are not checked here; the board takes care of them.
        """
        self.head = self.next_head_location()
        shifted = self.body[1:] + self.body[-1:]
        if has_eaten_food:
            shifted.append(self.head)
        else:
            shifted[-1] = self.head
        self.body = shifted

    def has_snake(self, here: GridCoords) -> bool:
        """Whether the given cell is occupied by the snake."""
        return here in self


class Board:
    """A square grid holding the snake and one piece of food."""

    def __init__(
        self,
        grid_size: int = DEFAULT_GRID_SIZE,
        init_snake_coords: GridCoords = DEFAULT_SNAKE_POS,
        rng: random.Random | None = None,
    ) -> None:
        if grid_size < 1:
            raise ValueError(f"grid size must be positive, got {grid_size}")
        if not (0 <= init_snake_coords.x < grid_size and 0 <= init_snake_coords.y < grid_size):
            raise ValueError(f"snake start {init_snake_coords} lies outside the grid")
        self.grid_size = grid_size
        self.init_snake_coords = init_snake_coords
        self._rng = rng if rng is not None else random.Random()
        self.snake = Snake(init_snake_coords)
        self.food_loc = GridCoords()
        self._spawn_new_food()

    def will_collide(self, next_loc: GridCoords) -> bool:
        """Whether a cell lies outside the grid or on the snake's body."""
        outside = not (0 <= next_loc.x < self.grid_size and 0 <= next_loc.y < self.grid_size)
        return outside or self.snake.has_snake(next_loc)

    def _spawn_new_food(self) -> None:
        if len(set(self.snake.body)) >= self.grid_size * self.grid_size:
            raise RuntimeError("no free cell left for food")
        while True:
            loc = GridCoords(
                self._rng.randrange(self.grid_size),
                self._rng.randrange(self.grid_size),
            )
            if not self.will_collide(loc):
                self.food_loc = loc
                return

    def update_snake_dir(self, direction: Direction) -> None:
        """Turn the snake; a snake longer than one cell cannot reverse."""
        direction = Direction(direction)
        if len(self.snake) > 1 and abs(direction - self.snake.direction) % 3 > 1:
            return
        self.snake.direction = direction

    def update(self) -> bool:
        """Advance the game one step; False means the snake has crashed."""
        next_head = self.snake.next_head_location()
        if self.will_collide(next_head):
            return False
        has_eaten_food = next_head == self.food_loc
        if has_eaten_food:
            self._spawn_new_food()
        self.snake.move(has_eaten_food)
        return True

    def reset(self) -> None:
        """Start a new game with a fresh snake and new food."""
        self.snake = Snake(self.init_snake_coords)
        self._spawn_new_food()