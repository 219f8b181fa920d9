"""Recording of the keys that took effect on each game tick."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator

_ITERATION = re.compile(r"\s*\+?(\d+)")


@dataclass
class IterationRecord:
    """The keys that took effect during one tick."""

    iteration: int
    keys: list[str] = field(default_factory=list)


class GameRecorder:
    """Keys grouped by the tick on which they were pressed, in order."""

    def __init__(self) -> None:
        self._records: list[IterationRecord] = []

    def record(self, iteration: int, key: str | int) -> None:
        character = key if isinstance(key, str) else chr(key)
        if not self._records or self._records[-1].iteration != iteration:
            self._records.append(IterationRecord(iteration))
        self._records[-1].keys.append(character)

    def __iter__(self) -> Iterator[IterationRecord]:
        return iter(self._records)

    def format(self) -> str:
        """One line per tick: the tick number, a colon, a space, the keys."""
        return "".join(f"{record.iteration}: {''.join(record.keys)}\n" for record in self._records)


def parse_step_line(line: str) -> tuple[int, tuple[str, ...]] | None:
    """Read a line written by :meth:`GameRecorder.format`.

    Returns the tick number and up to two keys, or None when the line does
    not start with a tick number. Keys are read only after a colon.
    """
    match = _ITERATION.match(line)
    if match is None:
        return None
    iteration = int(match.group(1))
    rest = line[match.end() :]
    if not rest.startswith(":"):
        return iteration, ()
    keys = rest[1:].lstrip()[:2]
    return iteration, tuple(keys)