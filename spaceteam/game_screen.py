"""The playing field: ships, items, bombs and enemies advancing tick by tick."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable

from . import algorithm
from .keyboard import Key
from .object_set import GameObjectSet
from .objects import BadShip, BigShip, Bomb, ExitPoint, GameObject, Item, Ship, SmallShip, Wall
from .point import DOWN, LEFT, RIGHT, UP, ZERO, Point
from .recorder import GameRecorder
from .screens import Screen

if TYPE_CHECKING:
    from .canvas import Canvas
    from .keyboard import Keyboard

SMALL_SHIP_INDEX = 0
BIG_SHIP_INDEX = 1
SHIPS_COUNT = 2

_SMALL_SHIP_MOVES = (
    (Key.X, DOWN),
    (Key.W, UP),
    (Key.A, LEFT),
    (Key.D, RIGHT),
)

_BIG_SHIP_MOVES = (
    ((Key.I, Key.NUM8), Key.I, UP),
    ((Key.M, Key.NUM2), Key.M, DOWN),
    ((Key.J, Key.NUM4), Key.J, LEFT),
    ((Key.L, Key.NUM6), Key.L, RIGHT),
)


class GameState(Enum):
    ONGOING = auto()
    WON = auto()
    LOST = auto()
    QUIT = auto()


@dataclass
class ShipInfo:
    """What a player ship intends to do during the current tick."""

    velocity: Point = ZERO
    push_pile: GameObjectSet = field(default_factory=GameObjectSet)
    pull_pile: GameObjectSet = field(default_factory=GameObjectSet)
    rotate: bool = False

    def reset(self) -> None:
        self.velocity = ZERO
        self.push_pile = GameObjectSet()
        self.pull_pile = GameObjectSet()
        self.rotate = False


Callback = Callable[[], None]


class GameScreen(Screen):
    """One level being played.

    *on_won*, *on_lost* and *on_menu* are called when the level is finished,
    when a ship is destroyed and when the in-game menu is requested.
    """

    def __init__(
        self,
        on_won: Callback | None = None,
        on_lost: Callback | None = None,
        on_menu: Callback | None = None,
    ) -> None:
        self._on_won = on_won
        self._on_lost = on_lost
        self._on_menu = on_menu

        self._all_objects = GameObjectSet()
        self._obstacles = GameObjectSet()
        self._items = GameObjectSet()
        self._bad_ships = GameObjectSet()
        self._bombs = GameObjectSet()
        self._exit_points = GameObjectSet()

        self._state = GameState.ONGOING
        self._friction = False

        self._ships: list[Ship | None] = [None] * SHIPS_COUNT
        self._ship_infos = [ShipInfo() for _ in range(SHIPS_COUNT)]

        self._prev_falling = GameObjectSet()
        self._curr_falling = GameObjectSet()

        self._iteration = 0
        self._recorder = GameRecorder()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def recorder(self) -> GameRecorder:
        return self._recorder

    @property
    def iterations(self) -> int:
        """Number of ticks played, counted as the recorder numbers them plus one."""
        return self._iteration + 1

    @property
    def friction(self) -> bool:
        return self._friction

    def add_game_object(self, game_object: GameObject) -> None:
        """Place *game_object* on the field according to its kind."""
        if isinstance(game_object, SmallShip):
            self._insert_ship(game_object, SMALL_SHIP_INDEX)
        elif isinstance(game_object, BigShip):
            self._insert_ship(game_object, BIG_SHIP_INDEX)
        elif isinstance(game_object, BadShip):
            self._bad_ships.add(game_object)
            self._all_objects.add(game_object)
            self._obstacles.add(game_object)
        elif isinstance(game_object, Item):
            self._items.add(game_object)
            self._obstacles.add(game_object)
            self._all_objects.add(game_object)
        elif isinstance(game_object, Wall):
            self._obstacles.add(game_object)
            self._all_objects.add(game_object)
        elif isinstance(game_object, ExitPoint):
            self._exit_points.add(game_object)
            self._all_objects.add(game_object)
        elif isinstance(game_object, Bomb):
            self._bombs.add(game_object)
            self._all_objects.add(game_object)
        else:
            raise TypeError(f"cannot place {type(game_object).__name__} on the field")

    def _insert_ship(self, ship: Ship, index: int) -> None:
        self._all_objects.add(ship)
        self._obstacles.add(ship)
        self._ships[index] = ship
        self._ship_infos[index].reset()

    def _remove_ship(self, index: int) -> None:
        ship = self._ships[index]
        if ship is not None:
            self._all_objects.discard(ship)
            self._obstacles.discard(ship)
        self._ships[index] = None

    def _present_ships(self):
        for index, ship in enumerate(self._ships):
            if ship is not None:
                yield index, ship, self._ship_infos[index]

    def is_game_over(self) -> bool:
        return self._state is not GameState.ONGOING

    def active_ships_count(self) -> int:
        return sum(ship is not None for ship in self._ships)

    def set_initial_state(self) -> None:
        self._iteration += 1
        for info in self._ship_infos:
            info.reset()

        self._prev_falling = self._curr_falling
        self._curr_falling = GameObjectSet(
            item for item in self._items if not algorithm.is_blocked(item, self._obstacles, DOWN)
        )

    def read_user_input(self, keyboard: Keyboard) -> None:
        small_info = self._ship_infos[SMALL_SHIP_INDEX]
        big_info = self._ship_infos[BIG_SHIP_INDEX]

        if keyboard.is_pressed(Key.ESC) and self._on_menu is not None:
            self._on_menu()

        if keyboard.is_pressed(Key.B):
            self._friction = not self._friction
            self._recorder.record(self._iteration, Key.B)

        small_key: Key | None = None
        if keyboard.is_pressed(Key.Z):
            small_key = Key.Z
            small_info.rotate = True
        else:
            for key, direction in _SMALL_SHIP_MOVES:
                if keyboard.is_pressed(key):
                    small_key = key
                    small_info.velocity = direction
                    break

        big_key: Key | None = None
        for keys, recorded, direction in _BIG_SHIP_MOVES:
            if any(keyboard.is_pressed(key) for key in keys):
                big_key = recorded
                big_info.velocity = direction
                break

        if keyboard.is_pressed(Key.P):
            self._set_state(GameState.WON)

        if small_key is not None:
            self._recorder.record(self._iteration, small_key)
        if big_key is not None:
            self._recorder.record(self._iteration, big_key)

    def process(self) -> None:
        ship_exploded = self._handle_bombs()

        for _, ship, _ in self._present_ships():
            if any(ship.is_touching(enemy) for enemy in self._bad_ships):
                ship.explode()
                ship_exploded = True

        crashed = [bad for bad in self._bad_ships if algorithm.is_crashed(bad, self._prev_falling)]
        for bad in crashed:
            self._all_objects.discard(bad)
            self._bad_ships.discard(bad)
            self._obstacles.discard(bad)

        for _, ship, _ in self._present_ships():
            if algorithm.is_crashed(ship, self._prev_falling):
                ship.explode()
                ship_exploded = True

        if ship_exploded:
            self._set_state(GameState.LOST)
            return

        for _, ship, info in self._present_ships():
            if info.velocity != ZERO:
                self._plan_move(ship, info)
            elif info.rotate:
                info.rotate = not any(ship.is_blocked_by(item, UP) for item in self._items) and not any(
                    ship.is_blocking_rotation(obstacle)
                    for obstacle in self._obstacles
                    if obstacle is not ship
                )

        self._resolve_pushes()

    def _handle_bombs(self) -> bool:
        detonated, affected = algorithm.handle_bombs(self._bombs, self._obstacles)

        self._all_objects.difference_update(detonated)
        self._bombs.difference_update(detonated)

        for collection in (
            self._all_objects,
            self._bad_ships,
            self._curr_falling,
            self._prev_falling,
            self._items,
            self._obstacles,
        ):
            collection.difference_update(affected)

        exploded = False
        for ship in self._ships:
            if ship is not None and ship in affected:
                ship.explode()
                exploded = True
        return exploded

    def _plan_move(self, ship: Ship, info: ShipInfo) -> None:
        pullable = self._items.copy()
        blockers = self._obstacles.copy()
        blockers.discard(ship)
        algorithm.remove_blocked(pullable, blockers, info.velocity)

        recursive = self._friction or info.velocity in (DOWN, UP)
        info.pull_pile = algorithm.touching_obstacles(ship, UP, pullable, recursive)
        info.pull_pile.add(ship)

        info.push_pile = algorithm.touching_obstacles(ship, info.velocity, self._obstacles, True)
        if self._friction:
            algorithm.expand_to_pile(info.push_pile, self._items)

        if not info.push_pile.is_pushable():
            info.velocity = ZERO
            info.push_pile.clear()
            info.pull_pile.clear()
        else:
            info.push_pile.difference_update(info.pull_pile)

    def _resolve_pushes(self) -> None:
        small_info = self._ship_infos[SMALL_SHIP_INDEX]
        big_info = self._ship_infos[BIG_SHIP_INDEX]

        if (
            self.active_ships_count() > 0
            and small_info.push_pile == big_info.push_pile
            and small_info.velocity == big_info.velocity
            and small_info.velocity != ZERO
        ):
            ships_mass = sum(ship.mass for _, ship, _ in self._present_ships())
            if big_info.push_pile.total_mass() > ships_mass:
                big_info.velocity = ZERO
                small_info.velocity = ZERO
            else:
                # Both ships push the same pile; only one of them should move it.
                big_info.push_pile.clear()
        else:
            for _, ship, info in self._present_ships():
                if ship.mass < info.push_pile.total_mass():
                    info.velocity = ZERO

    def update(self) -> None:
        if self.is_game_over():
            return

        for index, ship, info in list(self._present_ships()):
            if info.rotate:
                ship.rotate()
            elif info.velocity != ZERO:
                algorithm.move_all(info.push_pile, info.velocity)
                algorithm.move_all(info.pull_pile, info.velocity)

            if algorithm.collides_with_any(ship, self._exit_points):
                self._remove_ship(index)

        if self.active_ships_count() == 0:
            self._set_state(GameState.WON)
            return

        for bad in self._bad_ships:
            algorithm.update_bad_ship_position(
                bad,
                self._ships[SMALL_SHIP_INDEX],
                self._ships[BIG_SHIP_INDEX],
                self._obstacles,
            )

        algorithm.move_all(self._curr_falling, DOWN)
        algorithm.move_all(self._bombs, DOWN)

    def draw(self, canvas: Canvas) -> None:
        for game_object in self._all_objects:
            game_object.draw(canvas)

        canvas.print_notification(
            "Slow push mode: On" if self._friction else "Slow push mode: Off"
        )

        if self.is_game_over():
            canvas.save()

    def _set_state(self, new_state: GameState) -> None:
        if new_state is GameState.LOST:
            self.close()
            if self._on_lost is not None:
                self._on_lost()
        elif new_state is GameState.WON:
            self.close()
            if self._on_won is not None:
                self._on_won()
        elif new_state is GameState.QUIT:
            self.close()
        self._state = new_state