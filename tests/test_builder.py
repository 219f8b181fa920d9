import pytest

from spaceteam.builder import GameScreenBuilder
from spaceteam.canvas import Canvas, WIDTH
from spaceteam.files import FilesManager
from spaceteam.game_screen import GameScreen
from spaceteam.menus import MenuScreen

VALID = ["    ##        X", "@@  ##", "+  1"]
BLOCK = "\u2588"


def rows_of(screen):
    canvas = Canvas()
    canvas.begin()
    screen.draw(canvas)
    text = canvas.render()
    return [text[i * WIDTH : (i + 1) * WIDTH] for i in range(6)]


def write_level(directory, name, rows, first_line="ScreenID=1"):
    (directory / f"{name}.spg").write_text("\n".join([first_line, *rows]) + "\n")


def test_valid_level_builds_game_screen():
    builder = GameScreenBuilder()
    builder.load_from_lines(["ScreenID=7", *VALID])
    assert builder.is_valid()
    screen = builder.build()
    assert isinstance(screen, GameScreen)
    assert screen.active_ships_count() == 2
    rows = rows_of(screen)
    assert rows[0].rstrip() == VALID[0]
    assert rows[1].rstrip() == VALID[1]
    assert rows[2].rstrip() == BLOCK + "  1"


def test_invalid_character_becomes_wall():
    builder = GameScreenBuilder()
    builder.load_from_lines(["ScreenID=1", *VALID, "a"])
    assert builder.is_valid()
    assert rows_of(builder.build())[3].rstrip() == BLOCK


def test_empty_level_errors():
    builder = GameScreenBuilder()
    builder.load_from_lines(["ScreenID=1"])
    assert builder.errors == ("No small spaceship", "No big spaceship", "No exit point")
    assert not builder.is_valid()


def test_missing_screen_id():
    builder = GameScreenBuilder()
    builder.load_from_lines([])
    assert builder.errors[0] == "No screen ID"


def test_corrupted_screen_id():
    builder = GameScreenBuilder()
    builder.load_from_lines(["Level=1", *VALID])
    assert builder.errors == ("Corrupted screen ID line",)


def test_invalid_small_ship_reports_position():
    builder = GameScreenBuilder()
    builder.load_from_lines(["ScreenID=1", "@@@   ##   X", "      ##"])
    assert builder.errors == ("Invalid small spaceship at line 2, character 1",)


def test_invalid_big_ship():
    builder = GameScreenBuilder()
    builder.load_from_lines(["ScreenID=1", "@@  ###  X", "    #"])
    assert len(builder.errors) == 1
    assert builder.errors[0].startswith("Invalid big spaceship")


def test_too_many_small_ships():
    builder = GameScreenBuilder()
    builder.load_from_lines(["ScreenID=1", "@@ @@ ## X", "      ##"])
    assert builder.errors == ("Too many small spaceships",)


def test_diagonal_item_cells_are_separate_regions():
    builder = GameScreenBuilder()
    builder.load_from_lines(["ScreenID=1", "@@ ## X", "   ##", "1", " 1"])
    assert len(builder.errors) == 1
    assert builder.errors[0].startswith("Duplicated item '1'")


def test_vertically_connected_item_is_one_region():
    builder = GameScreenBuilder()
    builder.load_from_lines(["ScreenID=1", "@@ ## X", "   ##", "1", "1"])
    assert builder.is_valid()


def test_build_invalid_lists_errors():
    builder = GameScreenBuilder()
    builder.load_from_lines(["ScreenID=1"])
    screen = builder.build()
    assert isinstance(screen, MenuScreen)
    assert screen.lines == (
        "Errors:",
        "1. No small spaceship",
        "2. No big spaceship",
        "3. No exit point",
    )


def test_build_empties_builder():
    builder = GameScreenBuilder()
    builder.load_from_lines(["ScreenID=1", *VALID])
    builder.build()
    again = builder.build()
    assert isinstance(again, GameScreen)
    assert again.active_ships_count() == 0


def test_reload_clears_previous_errors():
    builder = GameScreenBuilder()
    builder.load_from_lines(["ScreenID=1"])
    builder.load_from_lines(["ScreenID=1", *VALID])
    assert builder.errors == ()


def test_duplicate_id_between_files(tmp_path):
    write_level(tmp_path, "a", VALID)
    write_level(tmp_path, "b", VALID)
    builder = GameScreenBuilder(FilesManager(str(tmp_path)))
    builder.load_from_file("a")
    assert builder.errors == ('Duplicate ID - "b"',)


def test_distinct_ids_are_valid(tmp_path):
    write_level(tmp_path, "a", VALID, "ScreenID=1")
    write_level(tmp_path, "b", VALID, "ScreenID=2")
    builder = GameScreenBuilder(FilesManager(str(tmp_path)))
    builder.load_from_file("b")
    assert builder.is_valid()


def test_missing_file(tmp_path):
    builder = GameScreenBuilder(FilesManager(str(tmp_path)))
    builder.load_from_file("nothing")
    assert "No screen ID" in builder.errors


def test_load_from_file_needs_files():
    with pytest.raises(ValueError):
        GameScreenBuilder().load_from_file("a")