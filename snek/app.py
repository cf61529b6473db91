"""Rendering, input handling and the main loop of the snake game."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache
from typing import Protocol

import pygame

from snek.board import Board, Direction, GridCoords

WIN_WIDTH = 1000
WIN_HEIGHT = 1000
DEFAULT_FONT_SIZE = 32
DEFAULT_OFFSET = 100
FRAME_DELAY_MS = 100
DEFAULT_FONT_PATH = "assets/EvilVampire-woqBn.ttf"

Color = tuple[int, int, int]
Point = tuple[float, float]

BACKGROUND_COLOR: Color = (46, 52, 64)  # #2e3440
BOUNDARY_COLOR: Color = (216, 222, 233)  # #d8dee9
GRID_LINE_COLOR: Color = (59, 66, 82)  # #3b4252
SNAKE_COLOR: Color = (163, 190, 140)  # #a3be8c
FOOD_COLOR: Color = (191, 97, 106)  # #bf616a
SCORE_COLOR: Color = (255, 255, 255)
TITLE_COLOR: Color = (235, 203, 139)
KEY_COLOR: Color = (180, 147, 173)
LABEL_COLOR: Color = (136, 192, 208)
OVERLAY_ALPHA = 200

_DIRECTION_KEYS = {
    "w": Direction.NORTH,
    "a": Direction.WEST,
    "s": Direction.SOUTH,
    "d": Direction.EAST,
}


class State(Enum):
    """What the game is currently showing."""

    PAUSED = auto()
    PLAY = auto()
    TITLE = auto()
    GAME_OVER = auto()


class _Font(Protocol):
    def render(self, text: str, antialias: bool, color: Color) -> pygame.Surface: ...


FontFactory = Callable[[int], _Font]


@dataclass(frozen=True)
class Layout:
    """Where the grid sits on screen and how large its cells are."""

    x_offset: float
    y_offset: float
    grid_length: float
    cell_size: float

    @classmethod
    def from_window(
        cls,
        width: int,
        height: int,
        grid_size: int,
        x_offset: float = DEFAULT_OFFSET,
        y_offset: float = DEFAULT_OFFSET,
    ) -> Layout:
        """Fit a square grid of ``grid_size`` cells inside the window margins."""
        if grid_size < 1:
            raise ValueError(f"grid size must be positive, got {grid_size}")
        grid_length = min(width - 2 * x_offset, height - 2 * y_offset)
        if grid_length <= 0:
            raise ValueError(f"window {width}x{height} leaves no room for the grid")
        return cls(x_offset, y_offset, grid_length, grid_length / grid_size)

    def absolute_coords(self, cell: GridCoords) -> Point:
        """Screen position of the top-left corner of a grid cell."""
        return (
            self.x_offset + cell.x * self.cell_size,
            self.y_offset + cell.y * self.cell_size,
        )

    def cell_rect(self, cell: GridCoords) -> tuple[float, float, float, float]:
        """The filled area of a cell, inset from its borders: (x, y, w, h)."""
        x, y = self.absolute_coords(cell)
        return (x + 5, y + 5, self.cell_size - 8, self.cell_size - 8)

    def grid_lines(self, grid_size: int) -> list[tuple[Point, Point]]:
        """Internal grid lines as (start, end) pairs, vertical and horizontal."""
        lines: list[tuple[Point, Point]] = []
        right = self.x_offset + self.grid_length
        bottom = self.y_offset + self.grid_length
        for i in range(1, grid_size):
            x = self.x_offset + self.cell_size * i
            y = self.y_offset + self.cell_size * i
            lines.append(((x, self.y_offset), (x, bottom)))
            lines.append(((self.x_offset, y), (right, y)))
        return lines

    @property
    def grid_rect(self) -> pygame.Rect:
        return pygame.Rect(
            round(self.x_offset),
            round(self.y_offset),
            round(self.grid_length),
            round(self.grid_length),
        )


class Game:
    """A board together with the screen state and how it is drawn."""

    def __init__(self, board: Board | None = None, layout: Layout | None = None) -> None:
        self.board = board if board is not None else Board()
        self.layout = (
            layout
            if layout is not None
            else Layout.from_window(WIN_WIDTH, WIN_HEIGHT, self.board.grid_size)
        )
        self.state = State.TITLE

    def handle_key(self, key: str) -> bool:
        """React to a key press by name; False means the player wants to quit."""
        key = key.lower()
        if key in _DIRECTION_KEYS:
            self.board.update_snake_dir(_DIRECTION_KEYS[key])
            self.state = State.PLAY
        elif key == "p":
            self.state = State.PAUSED
        elif key == "escape":
            return False
        return True

    def tick(self) -> None:
        """Advance the game one frame; a crash resets the board."""
        if self.state is State.PLAY and not self.board.update():
            self.board.reset()
            self.state = State.GAME_OVER

    def score(self) -> int:
        """Food eaten so far in the current game."""
        return len(self.board.snake) - 1

    def draw(self, surface: pygame.Surface, font_factory: FontFactory) -> None:
        """Draw the whole frame for the current state onto ``surface``."""
        surface.fill(BACKGROUND_COLOR)
        if self.state is State.PLAY:
            self._draw_playing_screen(surface, font_factory)
        elif self.state is State.PAUSED:
            self._draw_pause_screen(surface, font_factory)
        else:
            self._draw_title_screen(surface, font_factory)

    # -- drawing helpers -------------------------------------------------

    @staticmethod
    def _draw_text(
        surface: pygame.Surface,
        font: _Font,
        text: str,
        loc: Point,
        color: Color,
        centered: bool = False,
    ) -> None:
        rendered = font.render(text, True, color)
        x, y = loc
        if centered:
            x -= rendered.get_width() / 2
            y -= rendered.get_height() / 2
        surface.blit(rendered, (round(x), round(y)))

    def _draw_grid(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, BOUNDARY_COLOR, self.layout.grid_rect, 1)
        for start, end in self.layout.grid_lines(self.board.grid_size):
            pygame.draw.line(surface, GRID_LINE_COLOR, start, end)

    def _fill_cell(self, surface: pygame.Surface, cell: GridCoords, color: Color) -> None:
        x, y, w, h = self.layout.cell_rect(cell)
        pygame.draw.rect(surface, color, pygame.Rect(round(x), round(y), round(w), round(h)))

    def _draw_snake(self, surface: pygame.Surface) -> None:
        for cell in self.board.snake.body:
            self._fill_cell(surface, cell, SNAKE_COLOR)

    def _draw_food(self, surface: pygame.Surface) -> None:
        self._fill_cell(surface, self.board.food_loc, FOOD_COLOR)

    def _draw_score_board(self, surface: pygame.Surface, font_factory: FontFactory) -> None:
        layout = self.layout
        loc = (
            layout.x_offset + layout.grid_length / 2,
            layout.y_offset - layout.grid_length / 16,
        )
        self._draw_text(
            surface,
            font_factory(DEFAULT_FONT_SIZE * 2),
            f"Score: {self.score()}",
            loc,
            SCORE_COLOR,
            centered=True,
        )

    def _draw_interrupt_background(self, surface: pygame.Surface) -> None:
        self._draw_grid(surface)
        rect = self.layout.grid_rect
        overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        overlay.fill((*BACKGROUND_COLOR, OVERLAY_ALPHA))
        surface.blit(overlay, rect.topleft)

    def _draw_playing_screen(self, surface: pygame.Surface, font_factory: FontFactory) -> None:
        self._draw_grid(surface)
        self._draw_snake(surface)
        self._draw_food(surface)
        self._draw_score_board(surface, font_factory)

    def _draw_title_screen(self, surface: pygame.Surface, font_factory: FontFactory) -> None:
        self._draw_interrupt_background(surface)
        layout = self.layout
        gl = layout.grid_length

        self._draw_text(
            surface,
            font_factory(DEFAULT_FONT_SIZE + 200),
            "SNAKE !",
            (layout.x_offset + gl / 2, layout.y_offset + gl / 4),
            TITLE_COLOR,
            centered=True,
        )

        font = font_factory(DEFAULT_FONT_SIZE)
        x = layout.x_offset + gl / 4
        y = layout.y_offset + gl / 2 + 20
        self._draw_text(surface, font, "W", (x, y), KEY_COLOR, centered=True)
        y += 30
        self._draw_text(surface, font, "A  S  D", (x, y), KEY_COLOR, centered=True)
        y += 35
        self._draw_text(surface, font, "Movement", (x, y), LABEL_COLOR, centered=True)

        x = layout.x_offset + gl * 0.65
        y = layout.y_offset + gl / 2 + 5
        self._draw_text(surface, font, "P - ", (x, y), KEY_COLOR)
        self._draw_text(surface, font, "Pause", (x + 40, y), LABEL_COLOR)
        y += 40
        self._draw_text(surface, font, "Esc -", (x, y), KEY_COLOR)
        self._draw_text(surface, font, "Exit", (x + 55, y), LABEL_COLOR)

    def _draw_pause_screen(self, surface: pygame.Surface, font_factory: FontFactory) -> None:
        self._draw_playing_screen(surface, font_factory)
        self._draw_interrupt_background(surface)
        layout = self.layout
        center_x = layout.x_offset + layout.grid_length / 2
        center_y = layout.y_offset + layout.grid_length / 2
        self._draw_text(
            surface,
            font_factory(DEFAULT_FONT_SIZE + 50),
            "paused !",
            (center_x, center_y - 40),
            TITLE_COLOR,
            centered=True,
        )
        self._draw_text(
            surface,
            font_factory(DEFAULT_FONT_SIZE + 10),
            "Press any movement key to continue",
            (center_x, center_y + 40),
            LABEL_COLOR,
            centered=True,
        )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snek", description="Play snake.")
    parser.add_argument(
        "--font",
        default=DEFAULT_FONT_PATH,
        help="TrueType font used for all text (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until the player quits."""
    args = _parse_args(argv)
    pygame.init()
    try:
        try:
            pygame.font.Font(args.font, DEFAULT_FONT_SIZE)
        except (OSError, FileNotFoundError) as exc:
            print(f"Couldn't load font {args.font}: {exc}", file=sys.stderr)
            return 1

        @lru_cache(maxsize=None)
        def fonts(size: int) -> pygame.font.Font:
            return pygame.font.Font(args.font, size)

        try:
            screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        except pygame.error as exc:
            print(f"Couldn't create window: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption("snek")

        game = Game()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not game.handle_key(pygame.key.name(event.key)):
                        running = False
            if not running:
                break
            game.tick()
            game.draw(screen, fonts)
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())