[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceteam"
version = "0.1.0"
description = "A terminal puzzle game: steer two spaceships past falling items, bombs and enemy troops to the exit."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "terminal", "ascii", "spaceship"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spaceteam = "spaceteam.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spaceteam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
