"""The main menu, level and save selection, and the program's entry point."""

from __future__ import annotations

import sys
from enum import Enum, auto
from typing import TYPE_CHECKING

from . import canvas as cv
from .builder import GameScreenBuilder
from .canvas import Canvas
from .files import FilesManager, FileType
from .game import Game
from .keyboard import NUMBER_KEYS, Key, Keyboard
from .menus import InstructionsScreen, MenuScreen
from .point import DOWN, RIGHT
from .screens import ScreenManager
from .terminal import Terminal
from .validation import LevelValidationScreen

MAX_SUPPORTED_FILES = len(NUMBER_KEYS)


class LoadType(Enum):
    NEW_GAME = auto()
    SAVED_GAME = auto()


class LevelSelectionScreen(MenuScreen):
    """Lists up to nine levels or saved games; a number key picks one."""

    def __init__(self, game: Game, load_type: LoadType) -> None:
        super().__init__()
        self._game = game
        self._load_type = load_type
        self._file_names: list[str] = []
        self._options: list[str] = []

        files = game.files
        level_names = files.list_files(FileType.LEVEL)
        available = (
            files.list_files(FileType.SAVE) if load_type is LoadType.SAVED_GAME else level_names
        )
        for number, name in enumerate(available[:MAX_SUPPORTED_FILES], start=1):
            screen_id = files.screen_id(name, self._file_type)
            option = f"{number}) {name}"
            if screen_id is None:
                option += " (Currupted screen ID)"
            else:
                option += f" (Screen ID '{screen_id}'"
                if load_type is LoadType.SAVED_GAME:
                    option += f", Level: {self._level_name(screen_id, level_names)}"
                option += ")"
            self._file_names.append(name)
            self._options.append(option)

    @property
    def _file_type(self) -> FileType:
        return FileType.SAVE if self._load_type is LoadType.SAVED_GAME else FileType.LEVEL

    @property
    def load_type(self) -> LoadType:
        return self._load_type

    @property
    def options(self) -> tuple[str, ...]:
        return tuple(self._options)

    def _level_name(self, screen_id: int, levels: list[str]) -> str:
        for name in levels:
            if self._game.files.screen_id(name, FileType.LEVEL) == screen_id:
                return name
        return levels[0] if levels else ""

    def read_user_input(self, keyboard: Keyboard) -> None:
        if keyboard.is_pressed(Key.ESC):
            self.close()
            return

        selected = None
        for index, key in enumerate(NUMBER_KEYS[: len(self._options)]):
            if keyboard.is_pressed(key):
                selected = index
        if selected is None:
            return

        name = self._file_names[selected]
        screen_id = self._game.files.screen_id(name, self._file_type)
        if screen_id is not None:
            if self._load_type is LoadType.NEW_GAME:
                self._game.start(screen_id)
            else:
                self._game.load_game(name, screen_id)
            self.close()
        else:
            builder = GameScreenBuilder(self._game.files)
            builder.load_from_file(name)
            self._game.manager.add(builder.build())

    def draw(self, canvas: Canvas) -> None:
        position = cv.TOP_LEFT + RIGHT + DOWN
        if not self._options:
            canvas.draw(position, "No files are available")
            return
        canvas.draw(position, "Choose a game to play:")
        position = position + RIGHT + DOWN
        for option in self._options:
            position = position + DOWN
            canvas.draw(position, option)


class MainMenuScreen(MenuScreen):
    """The first screen of the program."""

    def __init__(self, game: Game) -> None:
        super().__init__()
        self._game = game
        for line in (
            "1. New game",
            "2. Instructions",
            "3. Validate level file",
            "4. Load game",
            "5. Select level",
            "",
            "9. Exit",
        ):
            self.append(line)

    def read_user_input(self, keyboard: Keyboard) -> None:
        manager = self._game.manager
        if keyboard.is_pressed(Key.NUM1):
            self._game.start(0)
        elif keyboard.is_pressed(Key.NUM2):
            manager.add(InstructionsScreen())
        elif keyboard.is_pressed(Key.NUM3):
            manager.add(LevelValidationScreen(self._game.files))
        elif keyboard.is_pressed(Key.NUM4):
            manager.add(LevelSelectionScreen(self._game, LoadType.SAVED_GAME))
        elif keyboard.is_pressed(Key.NUM5):
            manager.add(LevelSelectionScreen(self._game, LoadType.NEW_GAME))
        elif keyboard.is_pressed(Key.NUM9):
            self.close()


def main(argv: list[str] | None = None) -> int:
    """Play the game; the optional first argument is the levels directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    files = FilesManager()
    if args:
        files.change_directory(args[0])

    canvas = Canvas()
    keyboard = Keyboard()
    manager = ScreenManager()
    with Terminal() as terminal:
        game = Game(files, manager, terminal.prompt)
        manager.add(MainMenuScreen(game))
        manager.run(canvas, keyboard, terminal)
    return 0


if __name__ == "__main__":
    sys.exit(main())