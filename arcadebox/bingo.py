"""Single-card Bingo: draw numbers until a line is complete."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

MAX_NUM = 75
CARD_SIZE = 5
RANGE_WIDTH = 15
RANGES = 5
FREE = 0
HEADER = " B   I   N   G   O\n"


@dataclass
class BingoCard:
    """A square card; ``grid[row][col]`` holds a number, or 0 once marked."""

    grid: list[list[int]]

    @property
    def size(self) -> int:
        return len(self.grid)

    def mark(self, number: int) -> None:
        """Mark every cell that holds the number."""
        for row in self.grid:
            for col, value in enumerate(row):
                if value == number:
                    row[col] = FREE

    def has_won(self) -> bool:
        """True when a row, a column or a diagonal is fully marked."""
        n = self.size
        lines = [list(row) for row in self.grid]
        lines.extend([list(col) for col in zip(*self.grid)])
        lines.append([self.grid[i][i] for i in range(n)])
        lines.append([self.grid[i][n - 1 - i] for i in range(n)])
        return any(all(value == FREE for value in line) for line in lines)

    def render(self) -> str:
        rows = (
            "".join(" *  " if value == FREE else f"{value:2d}  " for value in row) + "\n"
            for row in self.grid
        )
        return HEADER + "".join(rows)


def generate_card(rng: Optional[random.Random] = None, size: int = CARD_SIZE) -> BingoCard:
    """Fill a card column by column from the B, I, N, G, O ranges with distinct numbers.

    Columns past the fifth draw from the O range. Raises ValueError when a range
    cannot supply enough distinct numbers for the columns that use it.
    """
    if size < 1:
        raise ValueError("card size must be positive")
    rng = random.Random() if rng is None else rng
    band_of = [min(col, RANGES - 1) for col in range(size)]
    for band in set(band_of):
        if band_of.count(band) * size > RANGE_WIDTH:
            raise ValueError(f"a {size}x{size} card needs more distinct numbers than exist")
    grid = [[0] * size for _ in range(size)]
    used: set[int] = set()
    for col, band in enumerate(band_of):
        low = band * RANGE_WIDTH + 1
        for row in range(size):
            number = rng.randrange(RANGE_WIDTH) + low
            while number in used:
                number = rng.randrange(RANGE_WIDTH) + low
            used.add(number)
            grid[row][col] = number
    if size > 2:
        grid[2][2] = FREE
    return BingoCard(grid)


def draw_number(rng: Optional[random.Random] = None) -> int:
    """Draw a number from 1 to 75."""
    rng = random.Random() if rng is None else rng
    return rng.randint(1, MAX_NUM)


def play_bingo(
    rng: Optional[random.Random] = None,
    input_fn: Callable[[], str] = input,
    out: Optional[TextIO] = None,
) -> list[int]:
    """Draw on each Enter until the card wins; return the numbers drawn."""
    rng = random.Random() if rng is None else rng
    out = sys.stdout if out is None else out
    card = generate_card(rng)
    out.write(card.render())
    drawn: list[int] = []
    while True:
        out.write("Press Enter to draw a number...")
        out.flush()
        input_fn()
        number = draw_number(rng)
        drawn.append(number)
        out.write(f"Drawn Number: {number}\n")
        card.mark(number)
        out.write(card.render())
        if card.has_won():
            out.write("Bingo! You've won!\n")
            return drawn


def main(argv: Optional[list[str]] = None) -> int:
    """Play one game of Bingo on the console."""
    try:
        play_bingo()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())