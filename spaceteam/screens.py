"""Screens and the stack that runs the topmost one each tick."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from .canvas import Canvas
    from .keyboard import Keyboard
    from .terminal import Terminal

TICKS_PER_SECOND = 8


class Screen:
    """One page of the game; every hook does nothing unless overridden."""

    manager: ScreenManager | None = None

    def close(self) -> None:
        """Ask the owning manager to drop this screen after the current tick."""
        if self.manager is not None:
            self.manager.remove(self)

    def set_initial_state(self) -> None:
        """Prepare for a new tick."""

    def read_user_input(self, keyboard: Keyboard) -> None:
        """React to the keys pressed this tick."""

    def process(self) -> None:
        """Work out what happens this tick."""

    def update(self) -> None:
        """Apply what was worked out in :meth:`process`."""

    def draw(self, canvas: Canvas) -> None:
        """Draw the screen on *canvas*."""


class ScreenManager:
    """A stack of screens; only the topmost one runs each tick."""

    def __init__(self) -> None:
        self._screens: list[Screen] = []
        self._pending_removal: list[Screen] = []
        self._remove_all = False

    @property
    def screens(self) -> tuple[Screen, ...]:
        return tuple(self._screens)

    def add(self, screen: Screen) -> None:
        screen.manager = self
        self._screens.append(screen)

    def remove(self, screen: Screen) -> None:
        """Remove *screen* once the current tick is over."""
        self._pending_removal.append(screen)

    def remove_all(self) -> None:
        """Remove every screen once the current tick is over."""
        self._remove_all = True

    def step(self, canvas: Canvas, keyboard: Keyboard, keys: Iterable[str | int] = "") -> bool:
        """Run one tick of the topmost screen with *keys* pressed.

        Returns True while screens remain.
        """
        if not self._screens:
            return False
        screen = self._screens[-1]
        screen.set_initial_state()
        keyboard.update(keys)
        screen.read_user_input(keyboard)
        screen.process()
        screen.update()
        canvas.begin()
        screen.draw(canvas)

        if self._remove_all:
            self._remove_all = False
            self._screens.clear()
            self._pending_removal.clear()
        else:
            while self._pending_removal:
                doomed = self._pending_removal.pop()
                for index, candidate in enumerate(self._screens):
                    if candidate is doomed:
                        del self._screens[index]
                        break
        return bool(self._screens)

    def run(self, canvas: Canvas, keyboard: Keyboard, terminal: Terminal) -> None:
        """Tick at a fixed rate, reading keys from and drawing on *terminal*."""
        frame = 1.0 / TICKS_PER_SECOND
        while self._screens:
            started = time.monotonic()
            self.step(canvas, keyboard, terminal.read_keys())
            canvas.end(terminal)
            elapsed = time.monotonic() - started
            if elapsed < frame:
                time.sleep(frame - elapsed)