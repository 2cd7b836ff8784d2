"""Board, frog position and statistics of the frog-crossing game."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path

ROWS_MAP = 21
COLS_MAP = 90
MAP_PADDING = 3
BOARD_M = 30
BOARD_N = ROWS_MAP + MAP_PADDING * 2
HUD_WIDTH = 12
BOARDS_BEGIN = 2

FROGSTART_X = BOARD_M // 2
FROGSTART_Y = BOARD_N

INITIAL_TIMEOUT = 150
TIMEOUT_STEP = 15
LEVEL_COUNT = 5
DEFAULT_LEVEL_DIR = "tests/levels"

EMPTY_ROAD = "0"
CAR = "]"
PROGRESS_STEP = BOARD_M // 5


class LevelError(Exception):
    """A level file is missing or too short."""


@dataclass
class Position:
    """Position of the frog on the board; row 1 is the finish line."""

    x: int = FROGSTART_X
    y: int = FROGSTART_Y

    @classmethod
    def start(cls) -> Position:
        return cls(FROGSTART_X, FROGSTART_Y)

    def reset(self) -> None:
        """Put the frog back on the starting cell."""
        self.x, self.y = FROGSTART_X, FROGSTART_Y


@dataclass
class GameStats:
    score: int = 0
    level: int = 1
    speed: int = 1
    lives: int = 9
    won: bool = False

    def timeout(self) -> int:
        """Input timeout in milliseconds for the current speed."""
        return INITIAL_TIMEOUT - self.speed * TIMEOUT_STEP


def _empty_ways() -> list[str]:
    return [EMPTY_ROAD * COLS_MAP for _ in range(ROWS_MAP)]


def _empty_finish() -> list[bool]:
    return [False] * BOARD_M


@dataclass
class Board:
    """The roads with their cars and the filled part of the finish line."""

    ways: list[str] = field(default_factory=_empty_ways)
    finish: list[bool] = field(default_factory=_empty_finish)

    def load_level(self, level_dir, level: int) -> None:
        """Read the roads of a level from level_<n>.txt in level_dir."""
        path = Path(level_dir) / f"level_{level}.txt"
        try:
            with path.open(encoding="latin-1") as handle:
                lines = [line.split("\n", 1)[0] for line in islice(handle, ROWS_MAP)]
        except OSError as exc:
            raise LevelError(f"cannot open level file {path}") from exc
        if len(lines) < ROWS_MAP:
            raise LevelError(f"level file {path} has fewer than {ROWS_MAP} rows")
        self.ways = [line[:COLS_MAP].ljust(COLS_MAP, EMPTY_ROAD) for line in lines]

    def fill_finish(self) -> None:
        """Empty the finish line."""
        self.finish = _empty_finish()

    def add_progress(self) -> None:
        """Fill the next stretch of the finish line."""
        position = next(
            (index for index, filled in enumerate(self.finish) if not filled), BOARD_M
        )
        end = min(position + PROGRESS_STEP, BOARD_M)
        self.finish[position:end] = [True] * (end - position)

    def level_complete(self) -> bool:
        return all(self.finish)

    def reached_finish(self, frog: Position) -> bool:
        return frog.y == 1

    def collides(self, frog: Position) -> bool:
        """Whether the frog stands on a car."""
        if not MAP_PADDING < frog.y < ROWS_MAP + MAP_PADDING + 1:
            return False
        return self.ways[frog.y - MAP_PADDING - 1][frog.x - 1] == CAR

    def shift(self) -> None:
        """Move the cars on every other road one cell to the right, wrapping around."""
        self.ways[1::2] = [row[-1] + row[:-1] for row in self.ways[1::2]]