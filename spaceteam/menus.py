"""Text screens: plain menus, the instructions page and the game-over banner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import canvas as cv
from .keyboard import Key
from .point import DOWN, LEFT, RIGHT, UP, Point
from .screens import Screen

if TYPE_CHECKING:
    from .canvas import Canvas
    from .keyboard import Keyboard

_BLOCK = "\u2588"

_INSTRUCTIONS = (
    f"{_BLOCK}{_BLOCK} Keys",
    f"{_BLOCK} Small spaceship:",
    f"{_BLOCK}  A/W/D/X  Move left/up/right/down",
    f"{_BLOCK}  Z        Rotate",
    _BLOCK,
    f"{_BLOCK} Big spaceship:",
    f"{_BLOCK}  J/I/L/M - Move left/up/right/down",
    _BLOCK,
    f"{_BLOCK}{_BLOCK} Objective",
    f"{_BLOCK} Get the two spaceships (@@, ##) through the exit point (marked by 'X').",
    f"{_BLOCK}                             ##",
    _BLOCK,
    f"{_BLOCK}{_BLOCK} Warning",
    f"{_BLOCK} Big items may damage the spaceships.",
    f"{_BLOCK} Bombs (marked by '*') detonate by thouch and explode.",
    f"{_BLOCK} Enemy troops (marked by 'W') are suicidal.",
    _BLOCK,
    f"{_BLOCK}{_BLOCK} Tip",
    f"{_BLOCK} Combine the power of the spaceships to move bigger items.",
)


class MenuScreen(Screen):
    """Lines of text kept centred on the screen; Esc closes it."""

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._max_length = 0
        self._draw_offset = cv.CENTER

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def rows_count(self) -> int:
        return len(self._lines)

    def append(self, line: str) -> None:
        """Add *line* below the others, shifting the block to stay centred."""
        self._lines.append(line)

        length = len(line)
        if length > self._max_length:
            factor = length - self._max_length
            if self._max_length % 2:
                factor += 1
            factor //= 2
            self._draw_offset = self._draw_offset + LEFT * factor
            self._max_length = length

        if self.rows_count % 2 == 0:
            self._draw_offset = self._draw_offset + UP

    def read_user_input(self, keyboard: Keyboard) -> None:
        if keyboard.is_pressed(Key.ESC):
            self.close()

    def draw(self, canvas: Canvas) -> None:
        position = self._draw_offset
        for line in self._lines:
            canvas.draw(position, line)
            position = position + DOWN


class InstructionsScreen(MenuScreen):
    """The keys, the objective and the dangers of the game."""

    def __init__(self) -> None:
        super().__init__()
        for line in _INSTRUCTIONS:
            self.append(line)


class GameOverScreen(Screen):
    """The last game frame with a banner and a highlight sweeping across it."""

    MESSAGE = "Game OVER!"
    HIGHLIGHT = _BLOCK

    def __init__(self) -> None:
        length = len(self.MESSAGE)
        self._draw_offset: Point = cv.CENTER + LEFT * (length // 2)
        self._highlight = self._draw_offset
        self._highlight_end = self._draw_offset + RIGHT * length

    def read_user_input(self, keyboard: Keyboard) -> None:
        if keyboard.is_pressed(Key.ESC):
            self.close()

    def update(self) -> None:
        self._highlight = self._highlight + RIGHT
        if self._highlight == self._highlight_end:
            self._highlight = self._draw_offset

    def draw(self, canvas: Canvas) -> None:
        canvas.restore()
        canvas.draw(self._draw_offset, self.MESSAGE)
        canvas.draw(self._highlight, self.HIGHLIGHT)