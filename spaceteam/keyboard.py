"""The set of keys pressed during one tick."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

SUPPORTED_KEYS = 128


class Key(IntEnum):
    ESC = 27
    ENTER = ord("\n")

    NUM0 = ord("0")
    NUM1 = ord("1")
    NUM2 = ord("2")
    NUM3 = ord("3")
    NUM4 = ord("4")
    NUM5 = ord("5")
    NUM6 = ord("6")
    NUM7 = ord("7")
    NUM8 = ord("8")
    NUM9 = ord("9")

    A = ord("a")
    B = ord("b")
    C = ord("c")
    D = ord("d")
    E = ord("e")
    F = ord("f")
    G = ord("g")
    H = ord("h")
    I = ord("i")  # noqa: E741
    J = ord("j")
    K = ord("k")
    L = ord("l")
    M = ord("m")
    N = ord("n")
    O = ord("o")  # noqa: E741
    P = ord("p")
    Q = ord("q")
    R = ord("r")
    S = ord("s")
    T = ord("t")
    U = ord("u")
    V = ord("v")
    W = ord("w")
    X = ord("x")
    Y = ord("y")
    Z = ord("z")


NUMBER_KEYS = (
    Key.NUM1,
    Key.NUM2,
    Key.NUM3,
    Key.NUM4,
    Key.NUM5,
    Key.NUM6,
    Key.NUM7,
    Key.NUM8,
    Key.NUM9,
)


class Keyboard:
    """Tracks which ASCII keys were pressed; letters are case-insensitive."""

    def __init__(self) -> None:
        self._pressed: set[int] = set()

    def update(self, characters: Iterable[str | int] = "") -> None:
        """Forget earlier presses and record each of *characters*."""
        self._pressed.clear()
        for character in characters:
            self.press(character)

    def is_pressed(self, key: Key | int) -> bool:
        return int(key) in self._pressed

    def press(self, character: str | int) -> None:
        code = character if isinstance(character, int) else ord(character)
        if code == ord("\r"):
            code = ord("\n")
        if ord("A") <= code <= ord("Z"):
            code += ord("a") - ord("A")
        if 0 <= code < SUPPORTED_KEYS:
            self._pressed.add(code)