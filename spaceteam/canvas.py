"""An off-screen character buffer the size of the screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import SCREEN_HEIGHT, SCREEN_WIDTH, TEXTURES_EMPTY
from .point import Point

if TYPE_CHECKING:
    from .terminal import Terminal

WIDTH = SCREEN_WIDTH
HEIGHT = SCREEN_HEIGHT
BUFFER_LENGTH = SCREEN_WIDTH * SCREEN_HEIGHT
NOTIFICATION_LENGTH = SCREEN_WIDTH - 1

TOP_LEFT = Point(0, 0)
BOTTOM_LEFT = Point(0, SCREEN_HEIGHT - 1)
TOP_RIGHT = Point(SCREEN_WIDTH - 1, 0)
BOTTOM_RIGHT = Point(SCREEN_WIDTH - 1, SCREEN_HEIGHT - 1)
CENTER = Point(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)


def serialize(position: Point) -> int:
    """Index of *position* in the row-major screen buffer."""
    index = position.y * SCREEN_WIDTH + position.x
    if not 0 <= index < BUFFER_LENGTH:
        raise ValueError(f"position {position} is outside the screen")
    return index


def deserialize(index: int) -> Point:
    """Screen position of a row-major buffer index."""
    if not 0 <= index < BUFFER_LENGTH:
        raise ValueError(f"index {index} is outside the screen")
    return Point(index % SCREEN_WIDTH, index // SCREEN_WIDTH)


class Canvas:
    """A screen buffer plus a notification bar drawn beneath it."""

    def __init__(self) -> None:
        self._buffer = [TEXTURES_EMPTY] * BUFFER_LENGTH
        self._backup = list(self._buffer)
        self._notification = [TEXTURES_EMPTY] * NOTIFICATION_LENGTH

    def draw(self, position: Point, text: str) -> None:
        """Write *text* from *position* onwards, running on into later rows."""
        start = serialize(position)
        chunk = text[: BUFFER_LENGTH - start]
        self._buffer[start : start + len(chunk)] = chunk

    def print_notification(self, notification: str) -> None:
        chunk = notification[:NOTIFICATION_LENGTH]
        self._notification[: len(chunk)] = chunk

    def save(self) -> None:
        self._backup = list(self._buffer)

    def restore(self) -> None:
        self._buffer = list(self._backup)

    def begin(self) -> None:
        """Blank the screen buffer and the notification bar."""
        self._buffer = [TEXTURES_EMPTY] * BUFFER_LENGTH
        self._notification = [TEXTURES_EMPTY] * NOTIFICATION_LENGTH

    def render(self) -> str:
        """The screen buffer as one string, row after row."""
        return "".join(self._buffer)

    def end(self, terminal: Terminal) -> None:
        """Show the buffer and the notification bar on *terminal*."""
        terminal.write_at(0, 0, self.render() + "".join(self._notification))