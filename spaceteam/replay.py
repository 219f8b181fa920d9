"""Playing back a recorded solution of a level."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .builder import GameScreenBuilder
from .files import FilesManager, FileType
from .game_screen import GameScreen
from .keyboard import Key, Keyboard
from .recorder import parse_step_line
from .screens import Screen

if TYPE_CHECKING:
    from .canvas import Canvas

# A solution file starts with the screen ID and the solver's name.
_HEADER_LINES = 2


class ReplayScreen(Screen):
    """Runs a level, feeding it the keys stored in its solution file.

    Keyword arguments are handed to the :class:`GameScreen` being replayed.
    """

    def __init__(self, files: FilesManager, level_name: str, **kwargs) -> None:
        builder = GameScreenBuilder(files)
        builder.load_from_file(level_name)
        if not builder.is_valid():
            raise ValueError(f"level {level_name!r} is not valid")
        game = builder.build(**kwargs)
        assert isinstance(game, GameScreen)
        self._game = game

        try:
            with files.open(level_name, FileType.SOLUTION) as stream:
                lines = stream.read().splitlines()
        except OSError:
            lines = []
        self._steps = iter(lines[_HEADER_LINES:])
        self._pending: tuple[int, tuple[str, ...]] | None = None
        self._iteration = 0

    @property
    def game(self) -> GameScreen:
        return self._game

    def set_initial_state(self) -> None:
        self._game.set_initial_state()

    def read_user_input(self, keyboard: Keyboard) -> None:
        if keyboard.is_pressed(Key.ESC):
            self.close()

        if self._pending is None:
            line = next(self._steps, None)
            if line is not None:
                parsed = parse_step_line(line)
                if parsed is not None and parsed[1]:
                    self._pending = parsed

        if self._pending is not None and self._pending[0] == self._iteration:
            recorded = Keyboard()
            for key in self._pending[1]:
                recorded.press(key)
            self._game.read_user_input(recorded)
            self._pending = None

        self._iteration += 1

    def process(self) -> None:
        self._game.process()

    def update(self) -> None:
        self._game.update()

    def draw(self, canvas: Canvas) -> None:
        self._game.draw(canvas)