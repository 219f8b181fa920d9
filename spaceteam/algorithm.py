"""Rules for how game objects block, push, pile up, explode and crash."""

from __future__ import annotations

from typing import Iterable

from .object_set import GameObjectSet
from .objects import Area, Bomb, GameObject, Ship
from .point import DOWN, LEFT, RIGHT, UP, ZERO, Point


def _is_blocked(
    game_object: GameObject,
    blocking_objects: Iterable[GameObject],
    direction: Point,
    ignore: set[int],
) -> bool:
    if id(game_object) in ignore:
        return False
    ignore.add(id(game_object))
    for blocker in blocking_objects:
        if game_object.is_blocked_by(blocker, direction) and id(blocker) not in ignore:
            if not blocker.pushable or _is_blocked(blocker, blocking_objects, direction, ignore):
                return True
    return False


def is_blocked(
    game_object: GameObject,
    blocking_objects: Iterable[GameObject],
    direction: Point,
    ignore: Iterable[GameObject] = (),
) -> bool:
    """True if something in *blocking_objects* stops *game_object* moving in *direction*.

    A pushable blocker only blocks if it is itself blocked further along.
    Objects in *ignore* are skipped.
    """
    blockers = list(blocking_objects)
    return _is_blocked(game_object, blockers, direction, {id(o) for o in ignore})


def collides_with_any(collider: GameObject, collidees: Iterable[GameObject]) -> bool:
    return any(collider.collides_with(other) for other in collidees)


def _collect_pile(
    pile_base: GameObject, pile: GameObjectSet, potential_members: list[GameObject]
) -> None:
    if pile_base in pile:
        return
    for member in potential_members:
        if member is not pile_base and pile_base.is_blocked_by(member, UP):
            pile.add(member)
            _collect_pile(member, pile, potential_members)


def piled_items(pile_base: GameObject, potential_members: Iterable[GameObject]) -> GameObjectSet:
    """Members of *potential_members* resting on *pile_base* (the base itself excluded)."""
    pile = GameObjectSet()
    _collect_pile(pile_base, pile, list(potential_members))
    return pile


def expand_to_pile(game_objects: GameObjectSet, potential_members: Iterable[GameObject]) -> None:
    """Add to *game_objects* whatever rests on each of its members."""
    members = list(potential_members)
    piles = GameObjectSet()
    for game_object in game_objects:
        _collect_pile(game_object, piles, members)
    game_objects.update(piles)


def remove_blocked(
    game_objects: GameObjectSet, potential_blockers: Iterable[GameObject], direction: Point
) -> None:
    """Drop from *game_objects* every member that cannot move in *direction*."""
    blockers = list(potential_blockers)
    for game_object in game_objects:
        if not game_object.pushable or is_blocked(game_object, blockers, direction):
            game_objects.discard(game_object)


def _collect_touching(
    current: GameObject,
    direction: Point,
    all_obstacles: list[GameObject],
    touching: GameObjectSet,
    recursive: bool,
    ignore: set[int],
) -> None:
    ignore.add(id(current))
    for obstacle in all_obstacles:
        if id(obstacle) in ignore:
            continue
        if current.is_blocked_by(obstacle, direction):
            touching.add(obstacle)
            if recursive:
                _collect_touching(obstacle, direction, all_obstacles, touching, recursive, ignore)


def touching_obstacles(
    root: GameObject,
    direction: Point,
    all_obstacles: Iterable[GameObject],
    recursive: bool = False,
) -> GameObjectSet:
    """Obstacles next to *root* in *direction*; with *recursive*, the whole chain of them."""
    touching = GameObjectSet()
    _collect_touching(root, direction, list(all_obstacles), touching, recursive, set())
    return touching


def is_touching_obstacles(
    game_object: GameObject, obstacles: Iterable[GameObject], direction: Point
) -> bool:
    return any(game_object.is_blocked_by(obstacle, direction) for obstacle in obstacles)


def handle_bombs(
    bombs: GameObjectSet, potentially_affected: Iterable[GameObject]
) -> tuple[GameObjectSet, GameObjectSet]:
    """Find the bombs that go off and the objects caught in their blasts.

    Returns ``(detonated_bombs, affected_objects)``. A bomb goes off when it
    touches any of *potentially_affected*; bombs inside a blast go off too.
    """
    candidates = list(potentially_affected)
    detonated = GameObjectSet()
    affected = GameObjectSet()
    queue: list[GameObject] = []

    def detonate(bomb: GameObject) -> None:
        if bomb not in detonated:
            detonated.add(bomb)
            queue.append(bomb)

    for bomb in bombs:
        for candidate in candidates:
            if bomb.is_touching(candidate):
                detonate(bomb)

    distance = Bomb.EXPLOSION_DISTANCE
    size = distance * 2 + 1
    for bomb in queue:
        area = Area(bomb.top_left() + (UP + LEFT) * distance, size, size)
        for candidate in candidates:
            if area.collides_with(candidate):
                if candidate in bombs:
                    detonate(candidate)
                else:
                    affected.add(candidate)
    return detonated, affected


def update_bad_ship_position(
    bad_ship: GameObject,
    small_ship: Ship | None,
    big_ship: Ship | None,
    obstacles: Iterable[GameObject],
) -> None:
    """Move *bad_ship* one step towards the nearer of the player ships."""
    obstacles = list(obstacles)
    position = bad_ship.top_left()

    if small_ship is None and big_ship is None:
        raise ValueError("there is no ship to chase")
    if small_ship is None:
        target = big_ship.closest_point_to(bad_ship)
    elif big_ship is None:
        target = small_ship.closest_point_to(bad_ship)
    else:
        small_target = small_ship.closest_point_to(bad_ship)
        big_target = big_ship.closest_point_to(bad_ship)
        small_distance = bad_ship.distance_to_point(small_target)
        big_distance = bad_ship.distance_to_point(big_target)
        target = big_target if big_distance <= small_distance else small_target

    vertical = ZERO
    if target.is_above(position):
        if not is_touching_obstacles(bad_ship, obstacles, UP):
            vertical = UP
    elif target.is_below(position):
        if not is_touching_obstacles(bad_ship, obstacles, DOWN):
            vertical = DOWN

    horizontal = ZERO
    if target.is_left_of(position):
        if not is_touching_obstacles(bad_ship, obstacles, LEFT):
            horizontal = LEFT
    elif target.is_right_of(position):
        if not is_touching_obstacles(bad_ship, obstacles, RIGHT):
            horizontal = RIGHT

    if horizontal == ZERO:
        bad_ship.move(vertical)
    elif vertical == ZERO:
        bad_ship.move(horizontal)
    elif position.horizontal_distance(target) >= position.vertical_distance(target):
        bad_ship.move(horizontal)
    else:
        bad_ship.move(vertical)


def move_all(game_objects: Iterable[GameObject], direction: Point) -> None:
    """Move every object one step in *direction* without any checks."""
    for game_object in game_objects:
        game_object.move(direction)


def is_crashed(game_object: GameObject, previously_falling: Iterable[GameObject]) -> bool:
    """True if the falling objects piled on top weigh at least half its mass."""
    pile = touching_obstacles(game_object, UP, previously_falling, True)
    endurance = game_object.mass // 2
    total = pile.total_mass()
    return total > 0 and total >= endurance


def is_push_direction(direction: Point) -> bool:
    return direction != ZERO and direction != DOWN