"""Console input and output: cursor placement and non-blocking key reads."""

from __future__ import annotations

import contextlib
import os
import select
import sys
from typing import IO, Iterator

try:
    import msvcrt
except ImportError:
    msvcrt = None  # type: ignore[assignment]

try:
    import termios
    import tty
except ImportError:
    termios = None  # type: ignore[assignment]
    tty = None  # type: ignore[assignment]

_CLEAR = "\x1b[2J\x1b[H"


def _is_tty(stream: IO[str]) -> bool:
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


class Terminal:
    """A console that can be written at any position and polled for keys.

    Used as a context manager, an interactive input is switched into
    character-at-a-time mode for the duration of the block.
    """

    def __init__(self, stdin: IO[str] | None = None, stdout: IO[str] | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._saved_attrs: list | None = None
        self._windows_console = msvcrt is not None and _is_tty(self._stdin)

    def __enter__(self) -> Terminal:
        if termios is not None and not self._windows_console and _is_tty(self._stdin):
            fd = self._stdin.fileno()
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        return self

    def __exit__(self, *args: object) -> None:
        if self._saved_attrs is not None:
            termios.tcsetattr(self._stdin.fileno(), termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None

    def write_at(self, x: int, y: int, text: str) -> None:
        """Write *text* starting at column *x*, row *y* (both from 0)."""
        self._stdout.write(f"\x1b[{y + 1};{x + 1}H{text}")
        self._stdout.flush()

    def read_keys(self) -> str:
        """Return every character typed so far without waiting for more."""
        if self._windows_console:
            keys = []
            while msvcrt.kbhit():
                keys.append(msvcrt.getwch())
            return "".join(keys)
        try:
            fd = self._stdin.fileno()
        except (AttributeError, OSError, ValueError):
            return self._stdin.read()
        chunks = []
        while select.select([fd], [], [], 0)[0]:
            data = os.read(fd, 1024)
            if not data:
                break
            chunks.append(data.decode(errors="replace"))
        return "".join(chunks)

    def clear(self) -> None:
        self._stdout.write(_CLEAR)
        self._stdout.flush()

    def prompt(self, message: str) -> str:
        """Show *message* on a clean screen and return the first word typed."""
        self.clear()
        self._stdout.write(f"{message} ")
        self._stdout.flush()
        with self._line_mode():
            reply = self._read_word()
        self.clear()
        return reply

    @contextlib.contextmanager
    def _line_mode(self) -> Iterator[None]:
        if self._saved_attrs is None:
            yield
            return
        fd = self._stdin.fileno()
        termios.tcsetattr(fd, termios.TCSADRAIN, self._saved_attrs)
        try:
            yield
        finally:
            tty.setcbreak(fd)

    def _read_word(self) -> str:
        while True:
            line = self._stdin.readline()
            if not line:
                return ""
            words = line.split()
            if words:
                return words[0]