"""A two-item receipt printer for the game store."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TextIO

from arcadebox.terminal import read_int

ITEM_COUNT = 2
FAREWELL = "Thank you for shopping Demi's Gamestore\n"


@dataclass(frozen=True)
class Item:
    name: str
    price: int


def format_receipt(items: Iterable[Item]) -> str:
    """Return the receipt text listing each item and the total."""
    items = list(items)
    lines = ["\nRECEIPT\n"]
    lines.extend(f"Product: {item.name}\nPrice: {item.price}\n" for item in items)
    lines.append(f"Total Price: {sum(item.price for item in items)}\n")
    lines.append(FAREWELL)
    return "".join(lines)


def _read_name(prompt: str, input_fn: Callable[[], str], out: TextIO) -> str:
    out.write(prompt)
    out.flush()
    while True:
        line = input_fn().strip()
        if line:
            return line


def run_store(
    input_fn: Callable[[], str] = input,
    out: Optional[TextIO] = None,
) -> list[Item]:
    """Ask for two products and prices, print the receipt and return the items."""
    out = sys.stdout if out is None else out
    items = []
    for number in range(1, ITEM_COUNT + 1):
        name = _read_name(f"Enter Product {number}: ", input_fn, out)
        price = read_int(f"Enter Price {number}: ", input_fn=input_fn, out=out)
        items.append(Item(name, price))
    out.write(format_receipt(items))
    return items


def main(argv: Optional[list[str]] = None) -> int:
    """Run the store on the console."""
    try:
        run_store()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())