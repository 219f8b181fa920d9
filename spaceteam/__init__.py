"""A terminal puzzle game of two spaceships, falling items, bombs and enemy troops."""

__version__ = "0.1.0"