"""Level progression, saved games, recorded solutions and the in-game menu."""

from __future__ import annotations

import re
from typing import Callable, Iterable

from .builder import GameScreenBuilder
from .canvas import HEIGHT, WIDTH, Canvas
from .files import FilesManager, FileType
from .game_screen import GameScreen
from .keyboard import Key, Keyboard
from .menus import GameOverScreen, MenuScreen
from .recorder import parse_step_line
from .replay import ReplayScreen
from .screens import ScreenManager

_ITERATION_LINE = re.compile(r"\s*\+?(\d+):")
_CLOCK_LINE = re.compile(r"ClockIterations=\s*\+?(\d+)")
_SOLVER_PREFIX = "NameOfSolver="

# A save file holds the screen ID, the clock counter and then the screen rows.
_SAVE_HEADER_LINES = 2


def _count_iterations(lines: Iterable[str]) -> int:
    """One more than the iteration number on the last step line."""
    count = 0
    for line in lines:
        match = _ITERATION_LINE.match(line)
        if match:
            count = int(match.group(1)) + 1
    return count


class Game:
    """Runs levels one after another on a screen manager.

    *prompt* is called with a message and returns the word the player typed.
    """

    def __init__(
        self,
        files: FilesManager,
        manager: ScreenManager,
        prompt: Callable[[str], str] | None = None,
    ) -> None:
        self.files = files
        self.manager = manager
        if prompt is None:
            from .terminal import Terminal

            prompt = Terminal().prompt
        self._prompt = prompt
        self.level_id = 0
        self.level_file_name = ""
        self._game_screen: GameScreen | None = None
        self._replay_screen: ReplayScreen | None = None

    @property
    def game_screen(self) -> GameScreen | None:
        return self._game_screen

    def steps(self) -> str:
        """The keys recorded in the current level, one line per iteration."""
        if self._game_screen is None:
            return ""
        return self._game_screen.recorder.format()

    def solution_iterations(self, level_name: str) -> int:
        """Clock ticks taken by the stored solution of *level_name*, or 0 if none."""
        try:
            with self.files.open(level_name, FileType.SOLUTION) as stream:
                return _count_iterations(stream.read().splitlines())
        except OSError:
            return 0

    def _build(self, builder: GameScreenBuilder):
        return builder.build(
            on_won=self.start_next_level,
            on_lost=self.game_over,
            on_menu=self._open_menu,
        )

    def _open_menu(self) -> None:
        self.manager.add(InGameMenuScreen(self))

    def _levels_by_id(self) -> list[tuple[int, str]]:
        levels = []
        for name in self.files.list_files(FileType.LEVEL):
            screen_id = self.files.screen_id(name, FileType.LEVEL)
            if screen_id is not None:
                levels.append((screen_id, name))
        levels.sort(key=lambda level: level[0])
        return levels

    def _start_level(self) -> None:
        for screen_id, name in self._levels_by_id():
            if screen_id < self.level_id:
                continue
            self.level_id = screen_id
            self.level_file_name = name
            builder = GameScreenBuilder(self.files)
            builder.load_from_file(name)
            if builder.is_valid():
                self._game_screen = self._build(builder)
                self.manager.add(self._game_screen)
                return
            self.level_id += 1
        self._display_end_game_screen()

    def start(self, level_id: int = 0) -> None:
        """Start the first playable level whose ID is at least *level_id*."""
        if not self.files.list_files(FileType.LEVEL):
            screen = MenuScreen()
            screen.append("Sorry, there are levels to be played.")
            self.manager.add(screen)
            return
        self.level_id = level_id
        self._start_level()

    def start_next_level(self) -> None:
        """Finish a replay, or record the solution and move to the next level."""
        if self._replay_screen is not None:
            self.manager.remove(self._replay_screen)
            self._replay_screen = None
            return
        self._save_solution()
        self.level_id += 1
        self._start_level()

    def save_game(self) -> None:
        """Ask for a name and write the current level's state under it."""
        if self._game_screen is None:
            raise RuntimeError("no game is being played")
        save_name = self._prompt("Game-save name:")

        canvas = Canvas()
        canvas.begin()
        self._game_screen.draw(canvas)
        picture = canvas.render()

        with self.files.create(save_name, FileType.SAVE) as stream:
            stream.write(f"ScreenID={self.level_id}\n")
            stream.write(f"ClockIterations={self._game_screen.iterations}\n")
            for row in range(HEIGHT):
                stream.write(picture[row * WIDTH : (row + 1) * WIDTH] + "\n")
            stream.write(self.steps())

    def load_game(self, save_name: str, screen_id: int) -> None:
        """Start level *screen_id* and replay the keys stored in *save_name*."""
        self.level_id = screen_id
        self._game_screen = None
        self._start_level()
        screen = self._game_screen
        if screen is None:
            return

        try:
            with self.files.open(save_name, FileType.SAVE) as stream:
                lines = stream.read().splitlines()
        except OSError:
            lines = []

        clock = 0
        if len(lines) > 1:
            match = _CLOCK_LINE.match(lines[1])
            if match:
                clock = int(match.group(1))

        keyboard = Keyboard()
        current = 0

        def tick() -> None:
            nonlocal current
            screen.set_initial_state()
            screen.read_user_input(keyboard)
            keyboard.update("")
            screen.process()
            screen.update()
            current += 1

        for line in lines[_SAVE_HEADER_LINES + HEIGHT :]:
            parsed = parse_step_line(line)
            if parsed is None:
                continue
            iteration, keys = parsed
            while current < iteration - 1:
                tick()
            for key in keys[:2]:
                keyboard.press(key)

        tick()
        while clock > current:
            tick()

    def restart(self) -> None:
        """Replace the current level with a fresh copy of it."""
        if self._game_screen is not None:
            self.manager.remove(self._game_screen)
        builder = GameScreenBuilder(self.files)
        builder.load_from_file(self.level_file_name)
        self._game_screen = self._build(builder)
        self.manager.add(self._game_screen)

    def _save_solution(self) -> None:
        if self._game_screen is None:
            return
        played = self._game_screen.iterations
        best = self.solution_iterations(self.level_file_name)
        if best != 0 and played >= best:
            return
        solver = self._prompt("Congratulations! You made a new record! What is your name?")
        steps = self.steps()
        with self.files.create(self.level_file_name, FileType.SOLUTION) as stream:
            stream.write(f"ScreenID={self.level_id}\n")
            stream.write(f"{_SOLVER_PREFIX}{solver}\n")
            stream.write(steps)

    def _display_end_game_screen(self) -> None:
        screen = MenuScreen()
        for line in (
            "Congratulations!",
            'You may receive the "Challanger" bedge',
            " by subscribing to our Facebook page!",
            "",
            "",
            "Best scores:",
        ):
            screen.append(line)

        levels = self.files.list_files(FileType.LEVEL)
        solutions = set(self.files.list_files(FileType.SOLUTION))
        for number, level in enumerate(levels, start=1):
            score = f"{number}. {level} - "
            if level not in solutions:
                score += "Unsolved!"
            else:
                try:
                    with self.files.open(level, FileType.SOLUTION) as stream:
                        lines = stream.read().splitlines()
                except OSError:
                    lines = []
                solver = lines[1][len(_SOLVER_PREFIX) :] if len(lines) > 1 else ""
                count = _count_iterations(lines[2:])
                score += f"by {solver} in {count} clock-ticks"
            screen.append(score)

        self.manager.add(screen)

    def play_solution(self) -> None:
        """Show the stored solution of the current level."""
        self._replay_screen = ReplayScreen(
            self.files,
            self.level_file_name,
            on_won=self.start_next_level,
            on_lost=self.game_over,
        )
        self.manager.add(self._replay_screen)

    def game_over(self) -> None:
        self.manager.add(GameOverScreen())

    def exit(self) -> None:
        """Leave the current level."""
        if self._game_screen is not None:
            self.manager.remove(self._game_screen)


class InGameMenuScreen(MenuScreen):
    """The menu opened with Esc while a level is played."""

    def __init__(self, game: Game) -> None:
        super().__init__()
        self._game = game
        for line in (
            "1. Restart level",
            "2. Save and exit to menu",
            "3. View level solution",
            "",
            "8. Exit to main menu",
            "9. Quit",
        ):
            self.append(line)

    def read_user_input(self, keyboard: Keyboard) -> None:
        if keyboard.is_pressed(Key.ESC):
            self.close()
        if keyboard.is_pressed(Key.NUM1):
            self._game.restart()
            self.close()
        elif keyboard.is_pressed(Key.NUM2):
            self._game.save_game()
            self._game.exit()
            self.close()
        elif keyboard.is_pressed(Key.NUM3):
            self._game.play_solution()
        elif keyboard.is_pressed(Key.NUM8):
            self._game.exit()
            self.close()
        elif keyboard.is_pressed(Key.NUM9):
            self._game.manager.remove_all()