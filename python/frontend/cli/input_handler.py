"""Single-keypress input for the CLI frontends.

Reads arrow keys, WASD and command letters without requiring Enter, and
turns them into puzzle actions.  Works on macOS / Linux (tty+termios) and
Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time
from enum import StrEnum

from backend.models.board import Direction


class Action(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    SHUFFLE = "shuffle"
    HINT = "hint"
    SOLVE = "solve"
    UNWIND = "unwind"
    ENTER = "enter"
    NONE = ""


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, Action] = {
    "w": Action.UP,
    "s": Action.DOWN,
    "a": Action.LEFT,
    "d": Action.RIGHT,
    "q": Action.QUIT,
    "\x03": Action.QUIT,  # Ctrl-C
    "r": Action.SHUFFLE,
    "n": Action.HINT,
    "v": Action.SOLVE,
    "u": Action.UNWIND,
    "\r": Action.ENTER,
    "\n": Action.ENTER,
}

_ARROW_MAP: dict[str, Action] = {
    "A": Action.UP,
    "B": Action.DOWN,
    "C": Action.RIGHT,
    "D": Action.LEFT,
}

_DIRECTIONS: dict[str, Direction] = {
    Action.UP: Direction.UP,
    Action.DOWN: Direction.DOWN,
    Action.LEFT: Direction.LEFT,
    Action.RIGHT: Direction.RIGHT,
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action, or the character itself."""
    action = _KEY_MAP.get(ch.lower())
    if action is not None:
        return action
    return ch if ch.isprintable() else Action.NONE


def to_direction(key: str | None) -> Direction | None:
    """Return the tile direction for a movement key, else ``None``."""
    if key is None:
        return None
    return _DIRECTIONS.get(key)


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.  Returns an :class:`Action` value, or
    the raw character for unmapped printable keys (menu digits).
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            return _ARROW_MAP.get(_getch(), Action.NONE)
        return Action.QUIT  # bare Escape

    return _resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress, waiting at most *timeout* seconds.

    Returns the same values as :func:`get_key`, or ``None`` if nothing was
    pressed.  Auto-solve replays use this as their pacing delay so a key
    press can cancel them.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None

        # os.read is unbuffered, so select() still sees the rest of a
        # multi-byte arrow sequence.
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
        if ch != "\x1b":
            return _resolve(ch)

        seq = ""
        for _ in range(2):
            more, _, _ = select.select([fd], [], [], 0.1)
            if not more:
                break
            seq += os.read(fd, 1).decode("utf-8", errors="ignore")
        if seq.startswith("[") and len(seq) == 2:
            return _ARROW_MAP.get(seq[1], Action.NONE)
        return Action.QUIT  # bare Escape
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def read_tile(first: str, max_digits: int, timeout: float = 0.6) -> int:
    """Collect a tile label that starts with the digit *first*.

    Further digits are accepted until *max_digits* are read, Enter is
    pressed, or no key arrives within *timeout* seconds.  A non-digit key
    ends the label and is discarded.
    """
    digits = first
    while len(digits) < max_digits:
        key = get_key_timeout(timeout)
        if key is None or not key.isdigit():
            break
        digits += key
    return int(digits)
