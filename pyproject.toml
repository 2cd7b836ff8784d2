[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickgame"
version = "1.0.0"
description = "Terminal brick games: a falling-block Tetris and a lane-crossing Frogger, played in curses"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetris", "frogger", "curses", "terminal", "game", "state-machine"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
brickgame-tetris = "brickgame.tetris.cli:main"
brickgame-frogger = "brickgame.frogger.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["brickgame"]

[tool.hatch.build.targets.sdist]
include = ["brickgame", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
