import random

import pytest

from snek.board import (
    DEFAULT_GRID_SIZE,
    DEFAULT_SNAKE_POS,
    Board,
    Direction,
    GridCoords,
    Snake,
)


def make_board(seed=1, **kwargs):
    return Board(rng=random.Random(seed), **kwargs)


def test_default_snake_position_is_grid_centre():
    assert DEFAULT_SNAKE_POS == GridCoords(DEFAULT_GRID_SIZE // 2 - 1, DEFAULT_GRID_SIZE // 2 - 1)


def test_grid_coords_equality():
    assert GridCoords(3, 4) == GridCoords(3, 4)
    assert GridCoords(3, 4) != GridCoords(4, 3)
    assert GridCoords() == GridCoords(0, 0)


def test_new_snake_has_only_head():
    head = GridCoords(5, 5)
    snake = Snake(head)
    assert len(snake) == 1
    assert snake.body == [head]
    assert head in snake
    assert snake.has_snake(head)
    assert not snake.has_snake(GridCoords(5, 6))


@pytest.mark.parametrize(
    "direction, dx, dy",
    [
        (Direction.NORTH, 0, -1),
        (Direction.EAST, 1, 0),
        (Direction.SOUTH, 0, 1),
        (Direction.WEST, -1, 0),
    ],
)
def test_next_head_location(direction, dx, dy):
    head = GridCoords(5, 5)
    snake = Snake(head)
    snake.direction = direction
    assert snake.next_head_location() == GridCoords(head.x + dx, head.y + dy)


def test_move_without_food_keeps_length():
    snake = Snake(GridCoords(5, 5))
    snake.direction = Direction.EAST
    expected = snake.next_head_location()
    snake.move()
    assert len(snake) == 1
    assert snake.head == expected
    assert snake.body[-1] == expected
    assert GridCoords(5, 5) not in snake


def test_move_with_food_grows_by_one():
    start = GridCoords(5, 5)
    snake = Snake(start)
    snake.direction = Direction.SOUTH
    expected = snake.next_head_location()
    snake.move(True)
    assert len(snake) == 2
    assert snake.body == [start, expected]


def test_long_snake_follows_its_head():
    snake = Snake(GridCoords(5, 5))
    snake.direction = Direction.EAST
    snake.move(True)
    snake.move(True)
    length = len(snake)
    for _ in range(4):
        snake.move()
        assert len(snake) == length
        assert snake.body[-1] == snake.head
    assert len(set(snake.body)) == length


def test_board_food_never_on_snake_and_inside_grid():
    for seed in range(50):
        board = make_board(seed, grid_size=3, init_snake_coords=GridCoords(1, 1))
        assert board.food_loc != GridCoords(1, 1)
        assert 0 <= board.food_loc.x < 3
        assert 0 <= board.food_loc.y < 3


def test_will_collide_with_walls_and_body():
    board = make_board()
    size = board.grid_size
    assert board.will_collide(GridCoords(size, 0))
    assert board.will_collide(GridCoords(0, size))
    assert board.will_collide(GridCoords(-1, 0))
    assert board.will_collide(GridCoords(0, -1))
    assert board.will_collide(DEFAULT_SNAKE_POS)
    assert not board.will_collide(GridCoords(0, 0))


def test_snake_runs_into_north_wall():
    board = make_board()
    board.food_loc = GridCoords(board.grid_size - 1, board.grid_size - 1)
    board.update_snake_dir(Direction.NORTH)
    for _ in range(DEFAULT_SNAKE_POS.y):
        assert board.update() is True
    assert board.snake.head == GridCoords(DEFAULT_SNAKE_POS.x, 0)
    assert board.update() is False
    assert board.snake.head == GridCoords(DEFAULT_SNAKE_POS.x, 0)


def test_eating_food_grows_snake_and_respawns_food():
    board = make_board(7)
    board.update_snake_dir(Direction.EAST)
    target = board.snake.next_head_location()
    board.food_loc = target
    assert board.update() is True
    assert len(board.snake) == 2
    assert board.snake.head == target
    assert board.food_loc not in board.snake


def test_single_cell_snake_may_reverse():
    board = make_board()
    board.update_snake_dir(Direction.NORTH)
    board.update_snake_dir(Direction.SOUTH)
    assert board.snake.direction == Direction.SOUTH


@pytest.mark.parametrize(
    "current, reverse",
    [
        (Direction.NORTH, Direction.SOUTH),
        (Direction.SOUTH, Direction.NORTH),
        (Direction.EAST, Direction.WEST),
        (Direction.WEST, Direction.EAST),
    ],
)
def test_long_snake_cannot_reverse(current, reverse):
    board = make_board()
    board.snake.body.append(GridCoords(0, 0))
    board.update_snake_dir(current)
    board.update_snake_dir(reverse)
    assert board.snake.direction == current


@pytest.mark.parametrize(
    "current, turn",
    [
        (Direction.NORTH, Direction.EAST),
        (Direction.NORTH, Direction.WEST),
        (Direction.WEST, Direction.NORTH),
        (Direction.EAST, Direction.SOUTH),
    ],
)
def test_long_snake_may_turn_ninety_degrees(current, turn):
    board = make_board()
    board.snake.body.append(GridCoords(0, 0))
    board.update_snake_dir(current)
    board.update_snake_dir(turn)
    assert board.snake.direction == turn


def test_reset_restores_starting_snake():
    board = make_board(3)
    board.update_snake_dir(Direction.EAST)
    board.food_loc = board.snake.next_head_location()
    board.update()
    assert len(board.snake) == 2
    board.reset()
    assert board.snake.body == [DEFAULT_SNAKE_POS]
    assert board.food_loc not in board.snake


def test_invalid_grid_size_rejected():
    with pytest.raises(ValueError):
        Board(grid_size=0)


def test_start_outside_grid_rejected():
    with pytest.raises(ValueError):
        Board(grid_size=5, init_snake_coords=GridCoords(5, 0))


def test_full_grid_has_no_room_for_food():
    with pytest.raises(RuntimeError):
        Board(grid_size=1, init_snake_coords=GridCoords(0, 0))