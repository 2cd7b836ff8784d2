"""Game state and rules of the falling-blocks game."""

from __future__ import annotations

import enum
import random
import re
from dataclasses import dataclass, field
from pathlib import Path

from .shapes import BLOCKS, HEIGHT, TETROMINOS, WIDTH, Location, tetromino_cell, tetromino_cells

_SPEEDS = (0, 17, 14, 12, 10, 9, 6, 5, 4, 3, 2)
MAX_LEVEL = len(_SPEEDS) - 1
LINE_SCORE = 100
LEVEL_SCORE = 600
DEFAULT_SAVE = "Tetris.save"


class UserAction(enum.Enum):
    """Actions a player can request."""

    START = enum.auto()
    PAUSE = enum.auto()
    TERMINATE = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    ACTION = enum.auto()


@dataclass
class Block:
    """One block of a tetromino with its kind, rotation and position."""

    kind: int = 0
    rotation: int = 0
    location: Location = field(default_factory=lambda: Location(0, 0))


class QuitRequested(Exception):
    """Raised when the player leaves the game; the high score is already saved."""


def game_speed(level: int) -> int:
    """Number of ticks between two automatic drops at the given level."""
    if not 0 <= level <= MAX_LEVEL:
        raise ValueError(f"no speed for level {level}")
    return _SPEEDS[level]


class TetrisGame:
    """The playing field, the falling figure and the game statistics."""

    def __init__(self, save_path=DEFAULT_SAVE, rng=None):
        self.save_path = Path(save_path)
        self._rng = rng if rng is not None else random.Random()
        self.field = [[0] * WIDTH for _ in range(HEIGHT)]
        self.current = [Block() for _ in range(BLOCKS)]
        self.next = [Block() for _ in range(BLOCKS)]
        self.score = 0
        self.high_score = 0
        self.level = 1
        self.speed = 1
        self.paused = False
        self.started = False
        self.stopped = False

    def _load_high_score(self) -> int:
        try:
            text = self.save_path.read_text()
        except OSError:
            return 0
        match = re.match(r"\s*([+-]?\d+)", text)
        return int(match.group(1)) if match else 0

    def _owns(self, row: int, column: int) -> bool:
        target = Location(row, column)
        return any(block.location == target for block in self.current)

    def start(self) -> None:
        """Load the high score, mark the game started and spawn the first figure."""
        self.high_score = self._load_high_score()
        self.started = True
        self.next[0].kind = self._rng.randrange(TETROMINOS)
        self.make_figures()

    def play_again(self) -> None:
        """Reset the score and level and continue after a game over."""
        self.score = 0
        self.level = 1
        self.make_figures()
        self.stopped = False

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def quit(self) -> None:
        """Save the high score and raise QuitRequested."""
        self.save_path.write_text(str(self.high_score))
        raise QuitRequested()

    def make_figures(self) -> None:
        """Promote the next figure to current, draw a new next one and place it."""
        kind = self.next[0].kind
        next_kind = self._rng.randrange(TETROMINOS)
        for block, cell in zip(self.current, tetromino_cells(kind, 0)):
            block.kind, block.rotation, block.location = kind, 0, cell
        for block, cell in zip(self.next, tetromino_cells(next_kind, 0)):
            block.kind, block.rotation, block.location = next_kind, 0, cell
        self.put_figure()

    def put_figure(self) -> None:
        """Mark the current figure on the field; a clash ends the game."""
        for block in self.current:
            if not self.started or self.stopped:
                return
            loc = block.location
            if self.field[loc.row][loc.column] == 1:
                self.terminate()
            else:
                self.field[loc.row][loc.column] = 1

    def remove_figure(self) -> None:
        for block in self.current:
            self.field[block.location.row][block.location.column] = 0

    def move_down(self) -> None:
        """Lower the figure by one row, or spawn a new one if it has landed."""
        if not self.can_go_down():
            self.make_figures()
            return
        self.remove_figure()
        for block in self.current:
            row, column = block.location.row, block.location.column
            if row < HEIGHT - 1:
                block.location = Location(row + 1, column)
                self.field[row + 1][column] = 1

    def terminate(self) -> None:
        """Stop the game and clear the field."""
        self.stopped = True
        for block in self.next:
            block.location = Location(0, 0)
            block.kind = self._rng.randrange(TETROMINOS)
        for block in self.current:
            block.location = Location(0, 0)
        for row in self.field:
            row[:] = [0] * WIDTH

    def can_go_down(self) -> bool:
        result = True
        for block in self.current:
            row, column = block.location.row, block.location.column
            if row == HEIGHT - 1:
                result = False
            elif self.field[row + 1][column] == 1 and not self._owns(row + 1, column):
                result = False
        return result

    def can_rotate(self) -> bool:
        head = self.current[0]
        rotation = (head.rotation + 1) % 4
        old = tetromino_cell(head.kind, head.rotation, 0)
        diff_row = head.location.row - old.row
        diff_col = head.location.column - old.column
        result = True
        for index, block in enumerate(self.current):
            cell = tetromino_cell(block.kind, rotation, index)
            row, column = cell.row + diff_row, cell.column + diff_col
            if not (0 <= row < HEIGHT and 0 <= column < WIDTH):
                result = False
            elif self.field[row][column] == 1 and not self._owns(row, column):
                result = False
        return result

    def _can_shift(self, step: int) -> bool:
        edge = 0 if step < 0 else WIDTH - 1
        result = True
        for block in self.current:
            row, column = block.location.row, block.location.column
            if column == edge:
                result = False
            elif self.field[row][column + step] == 1 and not any(
                other.location.column == column + step for other in self.current
            ):
                result = False
        return result

    def can_go_left(self) -> bool:
        return self._can_shift(-1)

    def can_go_right(self) -> bool:
        return self._can_shift(1)

    def rotate(self) -> None:
        """Turn the current figure a quarter turn if there is room."""
        if not self.can_rotate():
            return
        self.remove_figure()
        head = self.current[0]
        old = tetromino_cell(head.kind, head.rotation, 0)
        diff_row = head.location.row - old.row
        diff_col = head.location.column - old.column
        rotation = (head.rotation + 1) % 4
        for index, block in enumerate(self.current):
            cell = tetromino_cell(block.kind, rotation, index)
            block.rotation = rotation
            block.location = Location(cell.row + diff_row, cell.column + diff_col)
            self.field[block.location.row][block.location.column] = 1

    def move_figure(self, direction: UserAction) -> None:
        """Drop the figure, or shift it one column left or right."""
        if self.paused or not self.started:
            return
        if direction is UserAction.DOWN:
            while self.can_go_down():
                self.move_down()
        elif direction is UserAction.LEFT and self.can_go_left():
            self.move_left()
        elif direction is UserAction.RIGHT and self.can_go_right():
            self.move_right()

    def _shift(self, step: int) -> None:
        self.remove_figure()
        for block in self.current:
            row, column = block.location.row, block.location.column + step
            block.location = Location(row, column)
            self.field[row][column] = 1

    def move_left(self) -> None:
        self._shift(-1)

    def move_right(self) -> None:
        self._shift(1)

    def delete_lines(self) -> None:
        """Remove full rows, shift the rows above down and update score and level."""
        deleted = 0
        for line in range(1, HEIGHT):
            if self.is_full_line(line):
                self.field[1 : line + 1] = [list(row) for row in self.field[0:line]]
                deleted += 1
        if deleted:
            self.score += LINE_SCORE * 2 ** (deleted - 1)
            self.level = self.score // LEVEL_SCORE + 1

    def is_full_line(self, line: int) -> bool:
        return all(cell == 1 for cell in self.field[line])

    def user_input(self, action: UserAction, hold: bool) -> None:
        """Apply a player action; hold tells whether the game is already running."""
        if not hold:
            if action is UserAction.START:
                self.start()
            return
        if action is UserAction.PAUSE:
            self.toggle_pause()
        elif action is UserAction.TERMINATE:
            self.terminate()
        elif action in (UserAction.LEFT, UserAction.RIGHT, UserAction.DOWN):
            self.move_figure(action)
        elif action is UserAction.ACTION:
            self.rotate()

    def tick(self) -> None:
        """Advance the game by one timer tick."""
        if self.paused or not self.started or self.stopped:
            return
        self.delete_lines()
        if self.speed >= game_speed(min(self.level, MAX_LEVEL)):
            self.speed = 0
            self.move_down()
        self.high_score = max(self.score, self.high_score)
        self.speed += 1