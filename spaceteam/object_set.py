"""An insertion-ordered collection of game objects keyed by identity."""

from __future__ import annotations

from typing import Iterable, Iterator

from .objects import GameObject


class GameObjectSet:
    """Holds each object at most once, compared by identity, in insertion order."""

    def __init__(self, objects: Iterable[GameObject] = ()) -> None:
        self._objects: dict[int, GameObject] = {}
        self.update(objects)

    def add(self, game_object: GameObject) -> None:
        self._objects.setdefault(id(game_object), game_object)

    def update(self, others: Iterable[GameObject]) -> None:
        for game_object in list(others):
            self.add(game_object)

    def discard(self, game_object: GameObject) -> None:
        self._objects.pop(id(game_object), None)

    def difference_update(self, others: Iterable[GameObject]) -> None:
        for game_object in list(others):
            self.discard(game_object)

    def __contains__(self, game_object: object) -> bool:
        return self._objects.get(id(game_object)) is game_object

    def __iter__(self) -> Iterator[GameObject]:
        # Iterate over a snapshot so the set may change while being walked.
        return iter(list(self._objects.values()))

    def __len__(self) -> int:
        return len(self._objects)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameObjectSet):
            return NotImplemented
        return len(self) == len(other) and all(o in self for o in other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"GameObjectSet({list(self._objects.values())!r})"

    def clear(self) -> None:
        self._objects.clear()

    def copy(self) -> GameObjectSet:
        return GameObjectSet(self._objects.values())

    def is_pushable(self) -> bool:
        """True if every member can be pushed (and for an empty set)."""
        return all(o.pushable for o in self._objects.values())

    def total_mass(self) -> int:
        return sum(o.mass for o in self._objects.values())