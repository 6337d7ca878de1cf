"""A small Pac-Man game on a text board with randomly wandering demons."""

from __future__ import annotations

import random
import sys
from enum import Enum, auto
from typing import Callable, Optional, TextIO

from arcadebox.terminal import clear_screen, read_key

WIDTH = 40
HEIGHT = 20
INNER_WALLS = 50
DEMONS = 5
MIN_FOOD = 50
WIN_SCORE = 50
FOOD_ADJUSTMENT = 35

MOVES = {"w": (0, -1), "s": (0, 1), "a": (-1, 0), "d": (1, 0)}


class Cell(str, Enum):
    PACMAN = "C"
    WALL = "#"
    FOOD = "."
    EMPTY = " "
    DEMON = "X"


class Outcome(Enum):
    PLAYING = auto()
    LOST = auto()
    WON = auto()


class PacmanGame:
    """Board state: ``board[y][x]`` holds a Cell."""

    width = WIDTH
    height = HEIGHT

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = random.Random() if rng is None else rng
        self.score = 0
        self.eaten = 0
        self.food = 0
        self.outcome = Outcome.PLAYING
        self.board = [
            [
                Cell.WALL
                if y in (0, self.height - 1) or x in (0, self.width - 1)
                else Cell.EMPTY
                for x in range(self.width)
            ]
            for y in range(self.height)
        ]
        self._scatter(Cell.WALL, INNER_WALLS)
        self._scatter(Cell.DEMON, DEMONS)
        self.pacman_x = self.width // 2
        self.pacman_y = self.height // 2
        self.board[self.pacman_y][self.pacman_x] = Cell.PACMAN
        for y, row in enumerate(self.board):
            if y % 2:
                continue
            for x, cell in enumerate(row):
                if x % 2 == 0 and cell is Cell.EMPTY:
                    row[x] = Cell.FOOD
                    self.food += 1
        while self.food < MIN_FOOD:
            x, y = self._random_inner()
            if self.board[y][x] is Cell.EMPTY:
                self.board[y][x] = Cell.FOOD
                self.food += 1

    def _random_inner(self) -> tuple[int, int]:
        y = self.rng.randrange(self.height - 2) + 1
        x = self.rng.randrange(self.width - 2) + 1
        return x, y

    def _scatter(self, cell: Cell, count: int) -> None:
        while count > 0:
            x, y = self._random_inner()
            if self.board[y][x] not in (Cell.WALL, Cell.PACMAN):
                self.board[y][x] = cell
                count -= 1

    def move(self, dx: int, dy: int) -> Outcome:
        """Move Pac-Man by (dx, dy) unless a wall is in the way."""
        x = self.pacman_x + dx
        y = self.pacman_y + dy
        target = self.board[y][x]
        if target is Cell.WALL:
            return self.outcome
        if target is Cell.FOOD:
            self.score += 1
            self.food -= 1
            self.eaten += 1
            if self.score >= WIN_SCORE:
                self.outcome = Outcome.WON
                return self.outcome
        elif target is Cell.DEMON:
            self.outcome = Outcome.LOST
        self.board[self.pacman_y][self.pacman_x] = Cell.EMPTY
        self.pacman_x, self.pacman_y = x, y
        self.board[y][x] = Cell.PACMAN
        return self.outcome

    def move_demons(self) -> None:
        """Step every demon one random square, scanning the board row by row."""
        for y, row in enumerate(self.board):
            for x, cell in enumerate(row):
                if cell is not Cell.DEMON:
                    continue
                new_x = x + self.rng.randrange(3) - 1
                new_y = y + self.rng.randrange(3) - 1
                if (
                    0 < new_x < self.width - 1
                    and 0 < new_y < self.height - 1
                    and self.board[new_y][new_x] is not Cell.WALL
                ):
                    row[x] = Cell.EMPTY
                    self.board[new_y][new_x] = Cell.DEMON

    def render(self) -> str:
        lines = ("".join(cell.value for cell in row) + "\n" for row in self.board)
        return "".join(lines) + f"Score: {self.score}\n"


def play_pacman(
    rng: Optional[random.Random] = None,
    key_fn: Callable[[], str] = read_key,
    out: Optional[TextIO] = None,
) -> Optional[PacmanGame]:
    """Play until win, loss or quit; return the finished game, or None if declined."""
    out = sys.stdout if out is None else out
    game = PacmanGame(rng)
    total_food = game.food - FOOD_ADJUSTMENT
    out.write("Use buttons for w(up), a(left), d(right), and s(down)\nPress q to quit\n")
    out.write("Enter Y to continue: \n")
    if key_fn() not in ("Y", "y"):
        out.write("Exit Game! ")
        return None
    while True:
        clear_screen(out)
        out.write(game.render())
        game.move_demons()
        out.write(f"Total Food count: {total_food}\n")
        out.write(f"Total Food eaten: {game.eaten}\n")
        if game.outcome is Outcome.LOST:
            clear_screen(out)
            out.write(f"Game Over! Dead by Demon\nYour Score: {game.score}\n")
            return game
        if game.outcome is Outcome.WON:
            clear_screen(out)
            out.write(f"You Win! \nYour Score: {game.score}\n")
            return game
        key = key_fn()
        if key == "q":
            out.write(f"Game Over! Your Score: {game.score}\n")
            return game
        if key in MOVES:
            game.move(*MOVES[key])