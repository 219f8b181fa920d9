"""Reading a level description and turning it into a playable screen."""

from __future__ import annotations

import re
from typing import Iterable

from .canvas import HEIGHT, WIDTH, deserialize, serialize
from .config import (
    TEXTURES_BAD_SPACESHIP,
    TEXTURES_BIG_SPACESHIP,
    TEXTURES_BOMB,
    TEXTURES_EMPTY,
    TEXTURES_EXIT,
    TEXTURES_SMALL_SPACESHIP,
    TEXTURES_WALL,
    is_allowed_texture,
)
from .files import FilesManager, FileType
from .game_screen import GameScreen
from .menus import MenuScreen
from .objects import BadShip, BigShip, Bomb, ExitPoint, Item, SmallShip, Wall
from .point import DIRECTIONS, DOWN, LEFT, Point
from . import point as pt

_SCREEN_ID_LINE = re.compile(r"ScreenID=\s*\+?(\d+)")

# Line numbers shown to the user count from 1, and the first line holds the screen ID.
_LINE_OFFSET = 2
_COLUMN_OFFSET = 1


def _flood_fill(cells: list[str], target: str, start: Point) -> list[Point]:
    """Blank out the 4-connected region of *target* around *start*, returning its cells."""
    points: list[Point] = []
    stack = [start]
    while stack:
        position = stack.pop()
        index = serialize(position)
        if cells[index] != target:
            continue
        cells[index] = TEXTURES_EMPTY
        points.append(position)
        stack.extend(position + direction for direction in reversed(DIRECTIONS))
    return points


class GameScreenBuilder:
    """Parses a level, collects its objects and any errors, and builds a screen."""

    def __init__(self, files: FilesManager | None = None) -> None:
        self._files = files
        self._clear()

    def _clear(self) -> None:
        self._walls: list[Wall] = []
        self._items: list[Item] = []
        self._bombs: list[Bomb] = []
        self._bad_ships: list[BadShip] = []
        self._big_ships: list[BigShip] = []
        self._small_ships: list[SmallShip] = []
        self._exit_points: list[ExitPoint] = []
        self._errors: list[str] = []

    @property
    def errors(self) -> tuple[str, ...]:
        return tuple(self._errors)

    def is_valid(self) -> bool:
        return not self._errors

    def load_from_file(self, file_name: str) -> None:
        """Load the level file *file_name* from the working directory."""
        if self._files is None:
            raise ValueError("no files manager to load levels from")
        try:
            with self._files.open(file_name, FileType.LEVEL) as stream:
                lines = stream.read().splitlines()
        except OSError:
            lines = []
        self.load_from_lines(lines, file_name)

    def load_from_lines(self, lines: Iterable[str], file_name: str | None = None) -> None:
        """Load a level from its lines: a screen ID line, then the screen rows."""
        self._clear()
        rows = iter(lines)

        first = next(rows, None)
        if first is None:
            self._errors.append("No screen ID")
        else:
            match = _SCREEN_ID_LINE.match(first.rstrip("\r\n"))
            if match is None:
                self._errors.append("Corrupted screen ID line")
            else:
                self._check_duplicate_id(int(match.group(1)), file_name)

        cells: list[str] = []
        for _ in range(HEIGHT):
            line = next(rows, "").rstrip("\r\n")
            padded = line[:WIDTH].ljust(WIDTH, TEXTURES_EMPTY)
            cells.extend(c if is_allowed_texture(c) else TEXTURES_WALL for c in padded)

        seen_small = False
        seen_big = False
        for index, character in enumerate(cells):
            if character == TEXTURES_EMPTY:
                continue
            seen_small |= character == TEXTURES_SMALL_SPACESHIP
            seen_big |= character == TEXTURES_BIG_SPACESHIP
            points = _flood_fill(cells, character, deserialize(index))
            error = self._recognize(character, points)
            if error:
                line_number = _LINE_OFFSET + index // WIDTH
                column = _COLUMN_OFFSET + index % WIDTH
                self._errors.append(f"{error} at line {line_number}, character {column}")

        if not seen_small:
            self._errors.append("No small spaceship")
        elif len(self._small_ships) > 1:
            self._errors.append("Too many small spaceships")

        if not seen_big:
            self._errors.append("No big spaceship")
        elif len(self._big_ships) > 1:
            self._errors.append("Too many big spaceships")

        if not self._exit_points:
            self._errors.append("No exit point")

    def _check_duplicate_id(self, level_id: int, file_name: str | None) -> None:
        if self._files is None:
            return
        for other in self._files.list_files(FileType.LEVEL):
            if other != file_name and self._files.screen_id(other, FileType.LEVEL) == level_id:
                self._errors.append(f'Duplicate ID - "{other}"')

    def _recognize(self, character: str, points: list[Point]) -> str:
        """Create the objects for one region; return an error message or ''."""
        if character == TEXTURES_WALL:
            self._walls.extend(Wall(p) for p in points)
        elif character == TEXTURES_EXIT:
            self._exit_points.append(ExitPoint(points))
        elif character == TEXTURES_SMALL_SPACESHIP:
            if len(points) != 2:
                return "Invalid small spaceship"
            first, second = points
            bottom_left = Point(pt.left(first, second), pt.bottom(first, second))
            self._small_ships.append(SmallShip(bottom_left, first.y == second.y))
        elif character == TEXTURES_BIG_SPACESHIP:
            if len(points) != 4:
                return "Invalid big spaceship"
            bottom_left = Point(min(p.x for p in points), max(p.y for p in points))
            top_right = Point(max(p.x for p in points), min(p.y for p in points)) + DOWN + LEFT
            if bottom_left != top_right:
                return "Invalid big spaceship"
            self._big_ships.append(BigShip(bottom_left))
        elif character == TEXTURES_BAD_SPACESHIP:
            self._bad_ships.extend(BadShip(p) for p in points)
        elif character == TEXTURES_BOMB:
            self._bombs.extend(Bomb(p) for p in points)
        else:
            if any(item.texture == character for item in self._items):
                return f"Duplicated item '{character}'"
            self._items.append(Item(character, points))
        return ""

    def build(self, **kwargs) -> GameScreen | MenuScreen:
        """A game screen for a valid level, otherwise a screen listing the errors.

        Keyword arguments are handed to :class:`GameScreen`. The builder is
        emptied afterwards.
        """
        screen: GameScreen | MenuScreen
        if self.is_valid():
            screen = GameScreen(**kwargs)
            for group in (
                self._items,
                self._exit_points,
                self._walls,
                self._small_ships,
                self._big_ships,
                self._bad_ships,
                self._bombs,
            ):
                for game_object in group:
                    screen.add_game_object(game_object)
        else:
            screen = MenuScreen()
            screen.append("Errors:")
            for number, error in enumerate(self._errors, start=1):
                screen.append(f"{number}. {error}")
        self._clear()
        return screen