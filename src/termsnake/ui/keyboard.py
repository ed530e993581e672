"""Raw-mode keyboard polling for POSIX terminals"""

from __future__ import annotations

import os
import select
import sys
from collections import deque
from typing import Optional, TextIO

from termsnake.core.direction import Direction

# Final byte of the cursor-key escape sequences (ESC [ X or ESC O X)
_ARROWS = {"A": "up", "B": "down", "C": "right", "D": "left"}

KEY_DIRECTIONS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
    "k": Direction.UP,
    "j": Direction.DOWN,
    "h": Direction.LEFT,
    "l": Direction.RIGHT,
}

QUIT_KEYS = frozenset({"q", "esc", "ctrl-c"})


def parse_keys(data: str) -> list[str]:
    """Split raw terminal input into key names.

    Arrow keys become ``up``/``down``/``left``/``right``, a lone escape
    becomes ``esc``, Ctrl-C becomes ``ctrl-c`` and printable characters are
    lower-cased. Unknown escape sequences are dropped.
    """
    keys: list[str] = []
    i = 0
    while i < len(data):
        ch = data[i]
        if ch == "\x1b":
            if i + 2 < len(data) and data[i + 1] in "[O":
                name = _ARROWS.get(data[i + 2])
                if name:
                    keys.append(name)
                i += 3
                continue
            keys.append("esc")
            if data[i + 1 : i + 2] in ("[", "O") and i + 2 == len(data):
                # cut-off sequence, nothing more is coming
                break
        elif ch == "\x03":
            keys.append("ctrl-c")
        elif ch.isprintable():
            keys.append(ch.lower())
        i += 1
    return keys


def split_incomplete(data: str) -> tuple[str, str]:
    """Split off a trailing escape sequence that may still be arriving.

    Returns the complete prefix and the held-back tail (``""``, ``ESC``,
    ``ESC [`` or ``ESC O``).
    """
    if data.endswith("\x1b"):
        return data[:-1], data[-1:]
    if len(data) >= 2 and data[-2] == "\x1b" and data[-1] in "[O":
        return data[:-2], data[-2:]
    return data, ""


def key_to_direction(key: str) -> Optional[Direction]:
    """Map a key name to a direction, None for anything else"""
    return KEY_DIRECTIONS.get(key)


class RawKeyboard:
    """Non-blocking key reader.

    Use as a context manager: the terminal is switched to cbreak mode on
    enter and restored on exit, even if the game loop raises.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream or sys.stdin
        self._fd = self._stream.fileno()
        self._saved_attrs: Optional[list] = None
        self._pending: deque[str] = deque()
        self._partial = ""

    def __enter__(self) -> "RawKeyboard":
        import termios
        import tty

        if os.isatty(self._fd):
            self._saved_attrs = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved_attrs is not None:
            import termios

            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None

    def read_key(self, timeout: float) -> Optional[str]:
        """Wait up to ``timeout`` seconds for the next key.

        An escape byte at the end of a read is held back until the next
        read, since the rest of an arrow-key sequence may not have arrived
        yet. It only counts as a lone ``esc`` once a wait times out.
        """
        if self._pending:
            return self._pending.popleft()

        readable, _, _ = select.select([self._fd], [], [], timeout)
        if not readable:
            if self._partial:
                self._pending.extend(parse_keys(self._partial))
                self._partial = ""
            return self._pending.popleft() if self._pending else None

        data = self._partial + os.read(self._fd, 64).decode("utf-8", errors="ignore")
        complete, self._partial = split_incomplete(data)
        self._pending.extend(parse_keys(complete))
        return self._pending.popleft() if self._pending else None
