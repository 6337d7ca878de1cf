"""Main menu that greets the player and launches the arcade games."""

from __future__ import annotations

import random
import re
import sys
from typing import Callable, Optional, TextIO

from arcadebox.mathalas import boss_battle, play_math_alas
from arcadebox.pacman import play_pacman
from arcadebox.snakeladders import play_snake_ladders

MENU = (
    "1. Play Math-alas.\n2. Play Pac-Man.\n3. Play Snake and Ladders.\n"
    "4. Face the Boss.\n5. Exit\nAnswer: "
)
INVALID_CHOICE = (
    "\nInvalid input. Please enter 1 to play Math-alas, 2 to play Pac-Man, "
    "3 to play Snake and Ladders, 4 to face the boss, or 5 to exit.\n"
)
EXIT_CHOICE = 5

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _read_token(input_fn: Callable[[], str]) -> str:
    """Return the first whitespace-delimited word, skipping blank lines."""
    while True:
        words = input_fn().split()
        if words:
            return words[0]


def _read_choice(input_fn: Callable[[], str]) -> Optional[int]:
    """Return the number a menu line starts with, or None if it has none."""
    while True:
        line = input_fn()
        if not line.strip():
            continue
        match = _LEADING_INT.match(line)
        return int(match.group(1)) if match else None


def run_menu(
    input_fn: Callable[[], str] = input,
    out: Optional[TextIO] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Ask for a name, then offer games until the player exits; return the name."""
    out = sys.stdout if out is None else out
    rng = random.Random() if rng is None else rng
    out.write("Welcome user. What do you like to be called?\n")
    out.flush()
    username = _read_token(input_fn)
    out.write(f"\n\nHello, {username}! What would you like to do?\n")
    while True:
        out.write(MENU)
        out.flush()
        choice = _read_choice(input_fn)
        if choice == 1:
            out.write("\nWelcome to Math-alas!\n")
            play_math_alas(rng, input_fn, out)
            boss_battle(rng, input_fn, out)
        elif choice == 2:
            out.write("\nWelcome to Pac-Man!\n")
            play_pacman(rng, out=out)
        elif choice == 3:
            out.write("\nWelcome to Snake and Ladders!\n")
            play_snake_ladders(rng, input_fn, out)
        elif choice == 4:
            out.write("\nWelcome to the Boss Battle!\n")
            boss_battle(rng, input_fn, out)
        elif choice == EXIT_CHOICE:
            out.write(f"\nVery well, User: {username}! I hope you enjoyed your stay.\n")
            return username
        else:
            out.write(INVALID_CHOICE)


def main(argv: Optional[list[str]] = None) -> int:
    """Start the arcade menu."""
    try:
        run_menu()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())