"""Screen coordinates that wrap around the edges of the screen."""

from __future__ import annotations

from dataclasses import dataclass

from .config import SCREEN_HEIGHT, SCREEN_WIDTH


@dataclass(frozen=True)
class Point:
    """A position on the screen; y grows downwards.

    Addition and multiplication wrap around the screen, so moving left or up
    is done by adding a large offset rather than a negative one.
    """

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(
            (self.x + other.x) % SCREEN_WIDTH,
            (self.y + other.y % SCREEN_HEIGHT) % SCREEN_HEIGHT,
        )

    def __mul__(self, scalar: int) -> Point:
        if not isinstance(scalar, int):
            return NotImplemented
        return Point((self.x * scalar) % SCREEN_WIDTH, (self.y * scalar) % SCREEN_HEIGHT)

    def __floordiv__(self, scalar: int) -> Point:
        if not isinstance(scalar, int):
            return NotImplemented
        return Point(self.x // scalar, self.y // scalar)

    def horizontal_distance(self, other: Point) -> int:
        return abs(self.x - other.x)

    def vertical_distance(self, other: Point) -> int:
        return abs(self.y - other.y)

    def step_distance(self, other: Point) -> int:
        """Manhattan distance between the two points."""
        return self.horizontal_distance(other) + self.vertical_distance(other)

    def is_above(self, other: Point) -> bool:
        return self.y < other.y

    def is_below(self, other: Point) -> bool:
        return self.y > other.y

    def is_left_of(self, other: Point) -> bool:
        return self.x < other.x

    def is_right_of(self, other: Point) -> bool:
        return self.x > other.x


def _x(value: Point | int) -> int:
    return value.x if isinstance(value, Point) else value


def _y(value: Point | int) -> int:
    return value.y if isinstance(value, Point) else value


def left(a: Point | int, b: Point | int) -> int:
    """The smaller x of two points or two x values."""
    return min(_x(a), _x(b))


def right(a: Point | int, b: Point | int) -> int:
    """The larger x of two points or two x values."""
    return max(_x(a), _x(b))


def top(a: Point | int, b: Point | int) -> int:
    """The smaller y (higher on screen) of two points or two y values."""
    return min(_y(a), _y(b))


def bottom(a: Point | int, b: Point | int) -> int:
    """The larger y (lower on screen) of two points or two y values."""
    return max(_y(a), _y(b))


UP = Point(0, SCREEN_HEIGHT - 1)
DOWN = Point(0, 1)
LEFT = Point(SCREEN_WIDTH - 1, 0)
RIGHT = Point(1, 0)
ZERO = Point(0, 0)

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)