"""Text console: output, line input with backspace editing, screen clearing and a tick clock."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Callable, Optional, TextIO

__all__ = ["Console", "CLEAR_SEQUENCE", "TICKS_PER_DAY"]

CLEAR_SEQUENCE = "\x1b[2J\x1b[H"
TICKS_PER_DAY = 0x1800B0

_ENTER = ("\r", "\n")
_BACKSPACE = "\x08"


def _ticks_since_midnight() -> int:
    now = datetime.now()
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    seconds = (now - midnight).total_seconds()
    return int(seconds * TICKS_PER_DAY / 86400) % TICKS_PER_DAY


class Console:
    """A character console over a pair of text streams."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        *,
        echo: bool = True,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.echo = echo
        self._clock = clock if clock is not None else _ticks_since_midnight

    def print_string(self, text: str) -> None:
        """Write text to the console."""
        self._out.write(text)
        self._out.flush()

    def _echo(self, text: str) -> None:
        if self.echo:
            self.print_string(text)

    def read_string(self) -> str:
        """Read one line, handling backspace, until Enter.

        Raises EOFError if the input ends before any character was read.
        """
        chars: list[str] = []
        got_any = False
        while True:
            char = self._in.read(1)
            if char == "":
                if not got_any:
                    raise EOFError("end of console input")
                break
            got_any = True
            if char in _ENTER:
                break
            if char == _BACKSPACE:
                if chars:
                    chars.pop()
                    self._echo("\x08 \x08")
                continue
            chars.append(char)
            self._echo(char)
        self._echo("\r\n")
        return "".join(chars)

    def clear_screen(self) -> None:
        """Blank the screen and put the cursor at the top left."""
        self.print_string(CLEAR_SEQUENCE)

    def tick(self) -> int:
        """Clock ticks since midnight."""
        return self._clock()