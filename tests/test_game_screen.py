import pytest

from spaceteam import canvas as cv
from spaceteam.game_screen import GameScreen, GameState
from spaceteam.keyboard import Keyboard
from spaceteam.objects import BadShip, BigShip, Bomb, ExitPoint, GameObject, Item, SmallShip, Wall
from spaceteam.point import DOWN, RIGHT, Point


def tick(screen, keys=""):
    keyboard = Keyboard()
    keyboard.update(keys)
    screen.set_initial_state()
    screen.read_user_input(keyboard)
    screen.process()
    screen.update()


class Events:
    def __init__(self):
        self.won = 0
        self.lost = 0
        self.menu = 0

    def screen(self):
        return GameScreen(
            on_won=lambda: self._bump("won"),
            on_lost=lambda: self._bump("lost"),
            on_menu=lambda: self._bump("menu"),
        )

    def _bump(self, name):
        setattr(self, name, getattr(self, name) + 1)


class FakeTerminal:
    def __init__(self):
        self.text = ""

    def write_at(self, x, y, text):
        self.text = text


def test_unknown_object_is_rejected():
    screen = GameScreen()
    with pytest.raises(TypeError):
        screen.add_game_object(GameObject("?", [Point(1, 1)]))


def test_active_ships_count():
    screen = GameScreen()
    screen.add_game_object(SmallShip(Point(5, 10), True))
    screen.add_game_object(BigShip(Point(20, 10)))
    assert screen.active_ships_count() == 2


def test_small_ship_moves_right():
    screen = GameScreen()
    ship = SmallShip(Point(5, 10), True)
    screen.add_game_object(ship)
    before = ship.points
    tick(screen, "d")
    assert ship.points == tuple(p + RIGHT for p in before)
    assert not screen.is_game_over()


def test_keys_are_recorded():
    screen = GameScreen()
    screen.add_game_object(SmallShip(Point(5, 10), True))
    tick(screen, "d")
    assert screen.recorder.format() == "1: d\n"


def test_iterations_count_ticks():
    screen = GameScreen()
    screen.add_game_object(SmallShip(Point(5, 10), True))
    tick(screen)
    tick(screen)
    assert screen.iterations == 3


def test_wall_stops_ship():
    screen = GameScreen()
    ship = SmallShip(Point(5, 10), True)
    screen.add_game_object(ship)
    screen.add_game_object(Wall(Point(7, 10)))
    before = ship.points
    tick(screen, "d")
    assert ship.points == before


def test_ship_pushes_light_item():
    screen = GameScreen()
    ship = SmallShip(Point(5, 10), True)
    item = Item("1", [Point(7, 10)])
    screen.add_game_object(ship)
    screen.add_game_object(item)
    screen.add_game_object(Wall(Point(7, 11)))
    tick(screen, "d")
    assert item.points == (Point(7, 10) + RIGHT,)
    assert ship.points == (Point(6, 10), Point(7, 10))


def test_heavy_item_is_not_pushed():
    screen = GameScreen()
    ship = SmallShip(Point(5, 10), True)
    cells = [Point(7, 10), Point(8, 10), Point(9, 10)]
    item = Item("1", cells)
    screen.add_game_object(ship)
    screen.add_game_object(item)
    for cell in cells:
        screen.add_game_object(Wall(cell + DOWN))
    before = ship.points
    tick(screen, "d")
    assert ship.points == before
    assert item.points == tuple(cells)


def test_unsupported_item_falls():
    screen = GameScreen()
    screen.add_game_object(SmallShip(Point(5, 10), True))
    item = Item("2", [Point(20, 5)])
    screen.add_game_object(item)
    tick(screen)
    assert item.points == (Point(20, 5) + DOWN,)


def test_falling_item_crashes_ship():
    events = Events()
    screen = events.screen()
    screen.add_game_object(SmallShip(Point(5, 10), True))
    screen.add_game_object(Item("1", [Point(5, 8)]))
    tick(screen)
    assert events.lost == 0
    tick(screen)
    assert events.lost == 1
    assert screen.state is GameState.LOST


def test_touching_bomb_loses_game():
    events = Events()
    screen = events.screen()
    screen.add_game_object(SmallShip(Point(5, 10), True))
    screen.add_game_object(Bomb(Point(7, 10)))
    tick(screen)
    assert events.lost == 1
    assert screen.is_game_over()


def test_touching_enemy_loses_game():
    events = Events()
    screen = events.screen()
    screen.add_game_object(SmallShip(Point(5, 10), True))
    screen.add_game_object(BadShip(Point(7, 10)))
    tick(screen)
    assert events.lost == 1
    assert screen.state is GameState.LOST
    assert screen.is_game_over() is True


def test_reaching_exit_wins():
    events = Events()
    screen = events.screen()
    screen.add_game_object(SmallShip(Point(5, 10), True))
    screen.add_game_object(ExitPoint([Point(7, 10)]))
    tick(screen, "d")
    assert screen.active_ships_count() == 0
    assert events.won == 1
    assert screen.state is GameState.WON


def test_rotation_makes_ship_vertical():
    screen = GameScreen()
    ship = SmallShip(Point(5, 10), True)
    screen.add_game_object(ship)
    tick(screen, "z")
    xs = {p.x for p in ship.points}
    assert len(xs) == 1
    assert Point(5, 10) in ship.points


def test_escape_opens_menu():
    events = Events()
    screen = events.screen()
    screen.add_game_object(SmallShip(Point(5, 10), True))
    tick(screen, "\x1b")
    assert events.menu == 1
    assert not screen.is_game_over()


def test_p_skips_level():
    events = Events()
    screen = events.screen()
    screen.add_game_object(SmallShip(Point(5, 10), True))
    tick(screen, "p")
    assert events.won == 1
    assert screen.is_game_over()


def test_draw_places_ship_texture():
    screen = GameScreen()
    ship = SmallShip(Point(5, 10), True)
    screen.add_game_object(ship)
    canvas = cv.Canvas()
    canvas.begin()
    screen.draw(canvas)
    rendered = canvas.render()
    assert all(rendered[cv.serialize(p)] == "@" for p in ship.points)


def test_friction_toggle_shows_notification():
    screen = GameScreen()
    screen.add_game_object(SmallShip(Point(5, 10), True))
    tick(screen, "b")
    assert screen.friction is True
    canvas = cv.Canvas()
    canvas.begin()
    screen.draw(canvas)
    terminal = FakeTerminal()
    canvas.end(terminal)
    assert "Slow push mode: On" in terminal.text