"""Two-player Snake and Ladders on a 100-square board."""

from __future__ import annotations

import random
import sys
from typing import Callable, Iterator, Optional, TextIO

FINAL_SQUARE = 100
SNAKES_AND_LADDERS = {6: 40, 23: -10, 45: -7, 61: -18, 65: -8, 77: 5, 98: -10}


def roll_die(rng: Optional[random.Random] = None) -> int:
    """Return a die roll from 1 to 6."""
    rng = random.Random() if rng is None else rng
    return rng.randint(1, 6)


def move_player(position: int, roll: int) -> int:
    """Advance by the roll, apply any snake or ladder, and refuse moves past the end."""
    landing = position + roll
    square = landing + SNAKES_AND_LADDERS.get(landing, 0)
    if square > FINAL_SQUARE:
        return position
    return square


def _board_rows() -> Iterator[range]:
    for row_from_top in range(10):
        base = (9 - row_from_top) * 10
        squares = range(base + 1, base + 11)
        yield squares[::-1] if row_from_top % 2 == 0 else squares


def render_board(player1: int, player2: int) -> str:
    """Draw the board in boustrophedon order with the players' markers."""

    def label(square: int) -> str:
        if square == player1:
            return "#P1"
        if square == player2:
            return "#P2"
        return str(square)

    rows = ("".join(f"{label(square)}    " for square in row) + "\n\n" for row in _board_rows())
    return "".join(rows) + "\n"


def play_snake_ladders(
    rng: Optional[random.Random] = None,
    input_fn: Callable[[], str] = input,
    out: Optional[TextIO] = None,
) -> int:
    """Play until someone reaches the final square; return the winner's number."""
    rng = random.Random() if rng is None else rng
    out = sys.stdout if out is None else out
    out.write("Snake and Ladder Game\n")
    positions = {1: 0, 2: 0}
    current = 1
    while True:
        out.write(f"\nPlayer {current}, press Enter to roll the die...")
        out.flush()
        input_fn()
        roll = roll_die(rng)
        out.write(f"You rolled a {roll}.\n")
        positions[current] = move_player(positions[current], roll)
        lead = " " if current == 1 else ""
        out.write(f"{lead}Player {current} is now at square {positions[current]}.\n\n")
        out.write(render_board(positions[1], positions[2]))
        if positions[current] == FINAL_SQUARE:
            out.write(f"Player {current} wins!\n")
            return current
        current = 2 if current == 1 else 1