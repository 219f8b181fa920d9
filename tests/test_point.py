import pytest

from spaceteam.config import SCREEN_HEIGHT, SCREEN_WIDTH
from spaceteam.point import (
    DIRECTIONS,
    DOWN,
    LEFT,
    RIGHT,
    UP,
    ZERO,
    Point,
    bottom,
    left,
    right,
    top,
)


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_zero_is_identity(direction):
    assert direction + ZERO == direction
    assert Point(7, 3) + ZERO == Point(7, 3)


@pytest.mark.parametrize("forward,back", [(LEFT, RIGHT), (UP, DOWN), (RIGHT, LEFT), (DOWN, UP)])
def test_opposite_moves_cancel(forward, back):
    start = Point(10, 10)
    assert (start + forward) + back == start


def test_wraps_at_edges():
    assert Point(0, 0) + LEFT == Point(SCREEN_WIDTH - 1, 0)
    assert Point(0, 0) + UP == Point(0, SCREEN_HEIGHT - 1)
    assert Point(SCREEN_WIDTH - 1, 0) + RIGHT == Point(0, 0)
    assert Point(0, SCREEN_HEIGHT - 1) + DOWN == Point(0, 0)


def test_multiply_repeats_move():
    start = Point(20, 12)
    assert start + RIGHT * 3 == start + RIGHT + RIGHT + RIGHT
    assert start + (UP + LEFT) * 2 == start + UP + UP + LEFT + LEFT


def test_floordiv_does_not_wrap():
    assert Point(10, 6) // 2 == Point(5, 3)


def test_directions_relative():
    p = Point(10, 10)
    assert (p + UP).is_above(p)
    assert (p + DOWN).is_below(p)
    assert (p + LEFT).is_left_of(p)
    assert (p + RIGHT).is_right_of(p)
    assert not p.is_above(p)
    assert not p.is_left_of(p)


def test_distances_symmetric():
    a = Point(3, 9)
    b = Point(8, 2)
    assert a.horizontal_distance(b) == b.horizontal_distance(a)
    assert a.vertical_distance(b) == b.vertical_distance(a)
    assert a.step_distance(b) == a.horizontal_distance(b) + a.vertical_distance(b)
    assert a.step_distance(a) == 0


def test_neighbours_are_one_step_away():
    p = Point(10, 10)
    assert all((p + d).step_distance(p) == 1 for d in DIRECTIONS)


def test_extremes_of_points_and_values():
    a = Point(3, 9)
    b = Point(8, 2)
    assert left(a, b) == a.x
    assert right(a, b) == b.x
    assert top(a, b) == b.y
    assert bottom(a, b) == a.y
    assert left(a.x, b.x) == left(a, b)
    assert bottom(a.y, b.y) == bottom(a, b)