"""Terminal input and output shared by the games."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Iterable
from typing import Optional, TextIO

import blessed

KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_ESCAPE = "escape"
KEY_ENTER = "enter"

_SEQUENCE_NAMES = {
    "KEY_UP": KEY_UP,
    "KEY_DOWN": KEY_DOWN,
    "KEY_LEFT": KEY_LEFT,
    "KEY_RIGHT": KEY_RIGHT,
    "KEY_ESCAPE": KEY_ESCAPE,
    "KEY_ENTER": KEY_ENTER,
}

_PLAIN_NAMES = {
    "\x1b": KEY_ESCAPE,
    "\r": KEY_ENTER,
    "\n": KEY_ENTER,
}


def normalize_key(key) -> Optional[str]:
    """Turn a raw key or a terminal keystroke into a short key name.

    Arrow, escape and enter keys become the names defined in this module;
    any other key is returned as the character typed. No key gives None.
    """
    if key is None:
        return None
    if getattr(key, "is_sequence", False):
        name = getattr(key, "name", None)
        if name in _SEQUENCE_NAMES:
            return _SEQUENCE_NAMES[name]
        return name or str(key) or None
    text = str(key)
    if not text:
        return None
    return _PLAIN_NAMES.get(text, text)


class Console:
    """Screen and keyboard access for the games.

    Keys and lines can be supplied up front, which makes a session
    scripted; otherwise they are read from the real terminal.
    """

    def __init__(
        self,
        output: Optional[TextIO] = None,
        keys: Optional[Iterable] = None,
        lines: Optional[Iterable[str]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._output = output
        self._keys = iter(keys) if keys is not None else None
        self._lines = iter(lines) if lines is not None else None
        self._sleep = sleep
        self._terminal: Optional[blessed.Terminal] = None

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def _term(self) -> blessed.Terminal:
        if self._terminal is None:
            self._terminal = blessed.Terminal()
        return self._terminal

    def clear(self) -> None:
        """Blank the screen and put the cursor top left."""
        self.write("\x1b[2J\x1b[H")

    def write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def write_at(self, x: int, y: int, text: str) -> None:
        """Write text starting at column x of row y (both from zero)."""
        x = max(0, x)
        y = max(0, y)
        self.write(f"\x1b[{y + 1};{x + 1}H{text}")

    def read_key(self, timeout: Optional[float] = None) -> Optional[str]:
        """Wait for one key; with a timeout, give None if none arrives."""
        if self._keys is not None:
            try:
                key = next(self._keys)
            except StopIteration:
                if timeout is None:
                    raise EOFError("no more keys") from None
                return None
            return normalize_key(key)
        term = self._term()
        with term.cbreak():
            key = term.inkey(timeout=timeout)
        return normalize_key(key)

    def read_line(self, prompt: str = "") -> str:
        """Show a prompt and read one line of text."""
        self.write(prompt)
        if self._lines is not None:
            try:
                return next(self._lines)
            except StopIteration:
                raise EOFError("no more lines") from None
        return input()

    def pause(self, seconds: float) -> None:
        self.output.flush()
        self._sleep(seconds)