"""A screen for checking level files and listing their errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import canvas as cv
from .builder import GameScreenBuilder
from .files import FilesManager, FileType
from .keyboard import NUMBER_KEYS, Key
from .menus import MenuScreen
from .point import DOWN, RIGHT
from .screens import Screen

if TYPE_CHECKING:
    from .canvas import Canvas
    from .keyboard import Keyboard

MAX_SUPPORTED_FILES = len(NUMBER_KEYS)


class LevelValidationScreen(Screen):
    """Lists up to nine level files; pressing a number validates that file."""

    def __init__(self, files: FilesManager) -> None:
        self._files = files
        self._builder = GameScreenBuilder(files)
        self._file_names: list[str] = []
        self._options: list[str] = []

        names = files.list_files(FileType.LEVEL)[:MAX_SUPPORTED_FILES]
        for number, name in enumerate(names, start=1):
            screen_id = files.screen_id(name, FileType.LEVEL)
            if screen_id is None:
                description = " (Currupted screen ID)"
            else:
                description = f" (Screen ID '{screen_id}')"
            self._file_names.append(name)
            self._options.append(f"{number}) {name}{description}")

    @property
    def options(self) -> tuple[str, ...]:
        return tuple(self._options)

    @property
    def file_names(self) -> tuple[str, ...]:
        return tuple(self._file_names)

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

        self._builder.load_from_file(self._file_names[selected])
        if self._builder.is_valid():
            result = MenuScreen()
            result.append("No errors detected, the file is valid!")
        else:
            result = self._builder.build()
        if self.manager is not None:
            self.manager.add(result)

    def draw(self, canvas: Canvas) -> None:
        position = cv.TOP_LEFT + RIGHT + DOWN
        if not self._options:
            canvas.draw(position, "No files are available")
            return
        canvas.draw(position, "Choose a file to test:")
        position = position + RIGHT + DOWN
        for option in self._options:
            position = position + DOWN
            canvas.draw(position, option)