"""Things that occupy cells of the game board."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from . import point as pt
from .config import (
    TEXTURES_BAD_SPACESHIP,
    TEXTURES_BIG_SPACESHIP,
    TEXTURES_BOMB,
    TEXTURES_EMPTY,
    TEXTURES_EXIT,
    TEXTURES_SMALL_SPACESHIP,
)
from .point import DOWN, LEFT, RIGHT, UP, Point

if TYPE_CHECKING:
    from .canvas import Canvas

WALL_TEXTURE = "\u2588"


class GameObject:
    """A textured collection of cells; equality is identity."""

    def __init__(self, texture: str, points: Iterable[Point] = (), pushable: bool = False) -> None:
        self.texture = texture
        self.pushable = pushable
        self._points: list[Point] = list(points)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.texture!r}, {self._points!r})"

    @property
    def points(self) -> tuple[Point, ...]:
        return tuple(self._points)

    @property
    def mass(self) -> int:
        """Number of cells the object covers."""
        return len(self._points)

    def add_point(self, point: Point) -> None:
        self._points.append(point)

    def _replace_points(self, points: Iterable[Point]) -> None:
        self._points = list(points)

    def is_blocked_by(self, other: GameObject, direction: Point) -> bool:
        """True if moving one step in *direction* would overlap *other*."""
        others = set(other._points)
        return any(p + direction in others for p in self._points)

    def collides_with(self, other: GameObject) -> bool:
        others = set(other._points)
        return any(p in others for p in self._points)

    def is_touching(self, other: GameObject) -> bool:
        """True if *other* is adjacent on any of the four sides."""
        return any(self.is_blocked_by(other, d) for d in (LEFT, RIGHT, UP, DOWN))

    def top_left(self) -> Point:
        if not self._points:
            raise ValueError("object has no points")
        return Point(min(p.x for p in self._points), min(p.y for p in self._points))

    def distance_to_point(self, point: Point) -> int:
        """Smallest step distance from any of the object's cells to *point*."""
        if not self._points:
            raise ValueError("object has no points")
        return min(p.step_distance(point) for p in self._points)

    def distance_to(self, other: GameObject) -> int:
        """Step distance from *other* to this object's first cell."""
        if not self._points:
            raise ValueError("object has no points")
        return other.distance_to_point(self._points[0])

    def closest_point_to(self, other: GameObject) -> Point:
        """This object's first cell nearest to *other*."""
        if not self._points:
            raise ValueError("object has no points")
        return min(self._points, key=other.distance_to_point)

    def move(self, offset: Point) -> None:
        self._points = [p + offset for p in self._points]

    def draw(self, canvas: Canvas) -> None:
        for p in self._points:
            canvas.draw(p, self.texture)


class Area(GameObject):
    """An invisible rectangle, used for collision tests."""

    def __init__(self, top_left: Point, width: int, height: int) -> None:
        super().__init__(TEXTURES_EMPTY, (), False)
        row = top_left
        for _ in range(height):
            cell = row
            for _ in range(width):
                self.add_point(cell)
                cell = cell + RIGHT
            row = row + DOWN


class Bomb(GameObject):
    """A falling, pushable bomb that detonates when touched."""

    EXPLOSION_DISTANCE = 4

    def __init__(self, position: Point) -> None:
        super().__init__(TEXTURES_BOMB, (position,), True)


class Item(GameObject):
    """A pushable block labelled by a digit."""

    def __init__(self, texture: str, points: Iterable[Point]) -> None:
        super().__init__(texture, points, True)


class Wall(GameObject):
    """A single immovable wall cell."""

    def __init__(self, position: Point) -> None:
        super().__init__(WALL_TEXTURE, (position,), False)


class ExitPoint(GameObject):
    """The cells through which ships leave the level."""

    def __init__(self, points: Iterable[Point]) -> None:
        super().__init__(TEXTURES_EXIT, points, False)


class Ship(GameObject):
    """A rectangular ship built upwards and rightwards from its bottom-left cell."""

    def __init__(self, bottom_left: Point, width: int, height: int, texture: str) -> None:
        super().__init__(texture, (), False)
        row = bottom_left
        for _ in range(height):
            cell = row
            for _ in range(width):
                self.add_point(cell)
                cell = cell + RIGHT
            row = row + UP

    def is_blocking_rotation(self, other: GameObject) -> bool:
        return False

    def rotate(self) -> None:
        """Ships that cannot rotate stay as they are."""

    def explode(self) -> None:
        """Exploding leaves the ship in place."""


class SmallShip(Ship):
    """A two-cell ship that can turn between horizontal and vertical."""

    def __init__(self, bottom_left: Point, horizontal: bool) -> None:
        super().__init__(
            bottom_left,
            2 if horizontal else 1,
            1 if horizontal else 2,
            TEXTURES_SMALL_SPACESHIP,
        )

    def is_blocking_rotation(self, other: GameObject) -> bool:
        first, second = self._points[0], self._points[1]
        corner = Point(pt.left(first, second), pt.bottom(first, second)) + UP
        return other.collides_with(Area(corner, 2, 2))

    def rotate(self) -> None:
        first, second = self._points[0], self._points[1]
        bottom_left = Point(pt.left(first, second), pt.bottom(first, second))
        top_right = Point(pt.right(first, second), pt.top(first, second))
        if bottom_left.x == top_right.x:
            top_right = top_right + RIGHT + DOWN
        else:
            top_right = top_right + UP + LEFT
        self._replace_points((bottom_left, top_right))


class BigShip(Ship):
    """A two-by-two ship."""

    def __init__(self, bottom_left: Point) -> None:
        super().__init__(bottom_left, 2, 2, TEXTURES_BIG_SPACESHIP)


class BadShip(Ship):
    """A single-cell enemy ship."""

    def __init__(self, bottom_left: Point) -> None:
        super().__init__(bottom_left, 1, 1, TEXTURES_BAD_SPACESHIP)