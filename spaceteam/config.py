"""Screen dimensions and the characters that make up a level."""

SCREEN_WIDTH = 80
SCREEN_HEIGHT = 24

TEXTURES_WALL = "+"
TEXTURES_EXIT = "X"
TEXTURES_SMALL_SPACESHIP = "@"
TEXTURES_BIG_SPACESHIP = "#"
TEXTURES_BAD_SPACESHIP = "W"
TEXTURES_BOMB = "*"
TEXTURES_ITEMS = tuple("123456789")
TEXTURES_EMPTY = " "

ALLOWED_TEXTURES = frozenset(
    (
        TEXTURES_SMALL_SPACESHIP,
        TEXTURES_BIG_SPACESHIP,
        TEXTURES_BAD_SPACESHIP,
        TEXTURES_BOMB,
        TEXTURES_WALL,
        TEXTURES_EXIT,
        *TEXTURES_ITEMS,
        TEXTURES_EMPTY,
    )
)


def is_allowed_texture(character: str) -> bool:
    """Return True if *character* may appear in a level description."""
    return character in ALLOWED_TEXTURES