"""Console helpers shared by the games: screen clearing, key reads and number prompts."""

from __future__ import annotations

import os
import re
import sys
from typing import Callable, Optional, TextIO

try:
    import msvcrt
except ImportError:
    msvcrt = None
    import select
    import termios
    import tty

CLEAR_SEQUENCE = "\033[2J\033[H"
INVALID_NUMBER = "Invalid input! Please enter a number.\n"

_LEADING_INT = re.compile(r"[+-]?\d+")


def clear_screen(out: Optional[TextIO] = None) -> None:
    """Clear the terminal that ``out`` writes to."""
    out = sys.stdout if out is None else out
    out.write(CLEAR_SEQUENCE)
    out.flush()


def read_key() -> str:
    """Read one key press from standard input without waiting for Enter."""
    sys.stdout.flush()
    if msvcrt is not None:
        return msvcrt.getwch()
    if not sys.stdin.isatty():
        key = sys.stdin.read(1)
        if not key:
            raise EOFError("end of input")
        return key
    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        data = os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    if not data:
        raise EOFError("end of input")
    return data.decode("latin-1")


def key_pressed() -> bool:
    """Return True when a key press is waiting to be read."""
    if msvcrt is not None:
        return bool(msvcrt.kbhit())
    ready, _, _ = select.select([sys.stdin], [], [], 0)
    return bool(ready)


def read_int(
    prompt: str,
    retry_prompt: Optional[str] = None,
    input_fn: Callable[[], str] = input,
    out: Optional[TextIO] = None,
) -> int:
    """Prompt until a line starting with an integer is entered and return that integer.

    Blank lines are skipped silently; any other line that does not start with a
    number is reported and the retry prompt is shown again.
    """
    out = sys.stdout if out is None else out
    retry = prompt if retry_prompt is None else retry_prompt
    out.write(prompt)
    out.flush()
    while True:
        line = input_fn()
        match = _LEADING_INT.match(line.lstrip())
        if match:
            return int(match.group())
        if not line.strip():
            continue
        out.write(INVALID_NUMBER)
        out.write(retry)
        out.flush()