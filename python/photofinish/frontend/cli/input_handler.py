"""Single-keypress reader for the terminal frontend.

Reads arrow keys, WASD and a few command keys without waiting for Enter,
on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


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

    ch = msvcrt.getwch()
    # Windows reports arrows as a 0xe0 / 0x00 prefix plus a scan code.
    if ch in ("\x00", "\xe0"):
        return _WIN_ARROWS.get(msvcrt.getwch(), "")
    return ch


_WIN_ARROWS: dict[str, str] = {"H": "\x1b[A", "P": "\x1b[B", "M": "\x1b[C", "K": "\x1b[D"}

_getch = _getch_windows if os.name == "nt" else _getch_unix


ACTIONS: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "shuffle",
    "\r": "enter",
    "\n": "enter",
}

_ARROWS: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    if len(ch) > 1 and ch.startswith("\x1b["):
        return _ARROWS.get(ch[2:], "")
    return ACTIONS.get(ch.lower(), ch if ch.isprintable() else "")


def get_key() -> str:
    """Block for one keypress and return its action.

    One of ``"up"``, ``"down"``, ``"left"``, ``"right"``, ``"quit"``,
    ``"shuffle"``, ``"enter"``, an unmapped printable character, or ``""``.
    """
    ch = _getch()

    if ch == "\x1b":
        if _getch() == "[":
            return _ARROWS.get(_getch(), "")
        return "quit"  # bare Escape

    return resolve(ch)
