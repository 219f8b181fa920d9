import pytest

from spaceteam.canvas import HEIGHT, WIDTH, Canvas
from spaceteam.files import FilesManager
from spaceteam.game import Game, InGameMenuScreen
from spaceteam.game_screen import GameScreen
from spaceteam.keyboard import Keyboard
from spaceteam.menus import GameOverScreen, MenuScreen
from spaceteam.recorder import parse_step_line
from spaceteam.screens import ScreenManager


def level_text(screen_id, with_ships=True):
    grid = [[" "] * WIDTH for _ in range(HEIGHT)]
    if with_ships:
        grid[10][5] = grid[10][6] = "@"
        for y in (9, 10):
            for x in (10, 11):
                grid[y][x] = "#"
    grid[10][30] = "X"
    for x in range(40):
        grid[11][x] = "+"
    return f"ScreenID={screen_id}\n" + "\n".join("".join(row) for row in grid) + "\n"


def write(directory, name, text):
    (directory / name).write_text(text, encoding="utf-8")


def render(screen):
    canvas = Canvas()
    canvas.begin()
    screen.draw(canvas)
    return canvas.render()


class Prompt:
    def __init__(self):
        self.answer = "alice"
        self.messages = []

    def __call__(self, message):
        self.messages.append(message)
        return self.answer


@pytest.fixture
def env(tmp_path):
    files = FilesManager(str(tmp_path))
    manager = ScreenManager()
    prompt = Prompt()
    game = Game(files, manager, prompt)
    return game, manager, tmp_path, prompt


def step(manager, keys=""):
    manager.step(Canvas(), Keyboard(), keys)


def test_start_without_levels_shows_message(env):
    game, manager, _, _ = env
    game.start(0)
    top = manager.screens[-1]
    assert isinstance(top, MenuScreen)
    assert top.lines == ("Sorry, there are levels to be played.",)


def test_start_picks_lowest_id_at_least_requested(env):
    game, manager, tmp_path, prompt = env
    write(tmp_path, "b.spg", level_text(3))
    write(tmp_path, "a.spg", level_text(1))
    game.start(0)
    assert game.level_id == 1
    assert game.level_file_name == "a"
    assert isinstance(game.game_screen, GameScreen)
    assert manager.screens[-1] is game.game_screen

    other = Game(game.files, ScreenManager(), prompt)
    other.start(2)
    assert other.level_id == 3
    assert other.level_file_name == "b"


def test_invalid_level_is_skipped(env):
    game, _, tmp_path, _ = env
    write(tmp_path, "bad.spg", level_text(1, with_ships=False))
    write(tmp_path, "good.spg", level_text(2))
    game.start(0)
    assert game.level_id == 2
    assert game.level_file_name == "good"


def test_no_level_left_shows_scores(env):
    game, manager, tmp_path, _ = env
    write(tmp_path, "a.spg", level_text(1))
    game.start(5)
    top = manager.screens[-1]
    assert isinstance(top, MenuScreen)
    assert top.lines[0] == "Congratulations!"
    assert top.lines[-1] == "1. a - Unsolved!"


def test_scores_list_solver(env):
    game, manager, tmp_path, _ = env
    write(tmp_path, "a.spg", level_text(1))
    write(tmp_path, "a.sps", "ScreenID=1\nNameOfSolver=bob\n1: d\n")
    game.start(5)
    assert manager.screens[-1].lines[-1] == "1. a - by bob in 2 clock-ticks"


def test_solution_iterations(env):
    game, _, tmp_path, _ = env
    assert game.solution_iterations("missing") == 0
    write(tmp_path, "a.sps", "ScreenID=1\nNameOfSolver=bob\n3: d\n7: dl\n")
    assert game.solution_iterations("a") == 8


def test_winning_saves_solution_and_advances(env):
    game, manager, tmp_path, prompt = env
    write(tmp_path, "a.spg", level_text(1))
    write(tmp_path, "b.spg", level_text(2))
    game.start(0)
    step(manager, "p")
    assert len(prompt.messages) == 1
    lines = (tmp_path / "a.sps").read_text(encoding="utf-8").splitlines()
    assert lines[0] == "ScreenID=1"
    assert lines[1] == "NameOfSolver=alice"
    assert game.level_id == 2
    assert game.level_file_name == "b"
    assert manager.screens == (game.game_screen,)


def test_worse_solution_is_not_recorded(env):
    game, manager, tmp_path, prompt = env
    write(tmp_path, "a.spg", level_text(1))
    write(tmp_path, "a.sps", "ScreenID=1\nNameOfSolver=bob\n1: d\n")
    game.start(0)
    step(manager, "p")
    assert prompt.messages == []
    lines = (tmp_path / "a.sps").read_text(encoding="utf-8").splitlines()
    assert lines[1] == "NameOfSolver=bob"


def test_steps_records_iterations(env):
    game, manager, tmp_path, _ = env
    assert game.steps() == ""
    write(tmp_path, "a.spg", level_text(1))
    game.start(0)
    step(manager, "d")
    parsed = parse_step_line(game.steps().splitlines()[0])
    assert parsed[0] == 1


def test_save_and_load_round_trip(env):
    game, manager, tmp_path, prompt = env
    write(tmp_path, "a.spg", level_text(1))
    game.start(0)
    initial = render(game.game_screen)
    for keys in ("d", "", "d"):
        step(manager, keys)
    expected = render(game.game_screen)
    assert expected != initial

    prompt.answer = "slot"
    game.save_game()
    lines = (tmp_path / "slot.spp").read_text(encoding="utf-8").splitlines()
    assert lines[0] == "ScreenID=1"
    assert lines[1] == f"ClockIterations={game.game_screen.iterations}"
    assert lines[2 + 10] == expected[10 * WIDTH : 11 * WIDTH]

    other = Game(game.files, ScreenManager(), prompt)
    other.load_game("slot", 1)
    assert render(other.game_screen) == expected


def test_restart_restores_layout(env):
    game, manager, tmp_path, _ = env
    write(tmp_path, "a.spg", level_text(1))
    game.start(0)
    initial = render(game.game_screen)
    step(manager, "d")
    old = game.game_screen
    game.restart()
    step(manager, "")
    assert game.game_screen is not old
    assert manager.screens == (game.game_screen,)
    assert render(game.game_screen) == initial


def test_game_over_adds_banner(env):
    game, manager, _, _ = env
    game.game_over()
    assert len(manager.screens) == 1
    assert isinstance(manager.screens[-1], GameOverScreen)
    step(manager, "\x1b")
    assert manager.screens == ()


def test_escape_opens_menu_and_exit_returns(env):
    game, manager, tmp_path, _ = env
    write(tmp_path, "a.spg", level_text(1))
    game.start(0)
    step(manager, "\x1b")
    assert isinstance(manager.screens[-1], InGameMenuScreen)
    step(manager, "8")
    assert manager.screens == ()


def test_quit_removes_everything(env):
    game, manager, tmp_path, _ = env
    write(tmp_path, "a.spg", level_text(1))
    game.start(0)
    manager.add(InGameMenuScreen(game))
    step(manager, "9")
    assert manager.screens == ()


def test_menu_restart_keeps_one_level(env):
    game, manager, tmp_path, _ = env
    write(tmp_path, "a.spg", level_text(1))
    game.start(0)
    old = game.game_screen
    manager.add(InGameMenuScreen(game))
    step(manager, "1")
    assert manager.screens == (game.game_screen,)
    assert game.game_screen is not old