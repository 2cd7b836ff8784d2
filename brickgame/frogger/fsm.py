"""State machine that drives the frog-crossing game."""

from __future__ import annotations

import curses
import enum

from .board import (
    BOARD_M,
    BOARD_N,
    DEFAULT_LEVEL_DIR,
    LEVEL_COUNT,
    Board,
    GameStats,
    LevelError,
    Position,
)

ESCAPE_KEY = 27
ENTER_KEY = 10


class FrogState(enum.Enum):
    """Phases of the game."""

    START = 0
    SPAWN = 1
    MOVING = 2
    SHIFTING = 3
    REACH = 4
    COLLIDE = 5
    GAMEOVER = 6
    EXIT = 7
    FILE_ERROR = 8


class Signal(enum.IntEnum):
    """Player input as the state machine sees it."""

    MOVE_UP = 0
    MOVE_DOWN = 1
    MOVE_RIGHT = 2
    MOVE_LEFT = 3
    ESCAPE_BTN = 4
    ENTER_BTN = 5
    NOSIG = 6


_KEY_SIGNALS = {
    curses.KEY_UP: Signal.MOVE_UP,
    curses.KEY_DOWN: Signal.MOVE_DOWN,
    curses.KEY_LEFT: Signal.MOVE_LEFT,
    curses.KEY_RIGHT: Signal.MOVE_RIGHT,
    ESCAPE_KEY: Signal.ESCAPE_BTN,
    ENTER_KEY: Signal.ENTER_BTN,
}

_TERMINAL_STATES = frozenset({FrogState.GAMEOVER, FrogState.EXIT, FrogState.FILE_ERROR})
_INPUT_STATES = frozenset({FrogState.MOVING, FrogState.START})


def get_signal(key: int) -> Signal:
    """Map a key code to a signal; unknown keys give NOSIG."""
    return _KEY_SIGNALS.get(key, Signal.NOSIG)


class FroggerGame:
    """Game state together with the transition table of the state machine."""

    def __init__(self, level_dir=DEFAULT_LEVEL_DIR, view=None):
        self.level_dir = level_dir
        self.view = view
        self.state = FrogState.START
        self.stats = GameStats()
        self.board = Board()
        self.frog = Position.start()
        self._handlers = {
            FrogState.START: self._on_start,
            FrogState.SPAWN: self._on_spawn,
            FrogState.MOVING: self._on_moving,
            FrogState.SHIFTING: self._on_shifting,
            FrogState.REACH: self._on_reach,
            FrogState.COLLIDE: self._on_collide,
            FrogState.GAMEOVER: self._on_gameover,
        }

    def step(self, signal: Signal) -> FrogState:
        """Apply one signal in the current state and return the new state."""
        handler = self._handlers.get(self.state)
        if handler is not None:
            handler(signal)
        return self.state

    def finished(self) -> bool:
        """Whether the game has reached a state it does not leave."""
        return self.state in _TERMINAL_STATES

    def wants_input(self) -> bool:
        """Whether the next step should read a fresh key."""
        return self.state in _INPUT_STATES

    def _render(self, name: str, *args) -> None:
        """Forward a drawing call to the view, when there is one."""
        if self.view is not None:
            getattr(self.view, name)(*args)

    def _on_start(self, signal: Signal) -> None:
        if signal is Signal.ENTER_BTN:
            self.state = FrogState.SPAWN
        elif signal is Signal.ESCAPE_BTN:
            self.state = FrogState.EXIT

    def _on_spawn(self, signal: Signal) -> None:
        if self.stats.level > LEVEL_COUNT:
            self.state = FrogState.GAMEOVER
            return
        try:
            self.board.load_level(self.level_dir, self.stats.level)
        except LevelError:
            self.state = FrogState.FILE_ERROR
            return
        self.board.fill_finish()
        self._render("finish_line", self.board)
        self.frog.reset()
        self.state = FrogState.MOVING

    def _move(self, signal: Signal) -> None:
        frog = self.frog
        if signal is Signal.MOVE_UP:
            blocked, dx, dy = frog.y == 1, 0, -2
        elif signal is Signal.MOVE_DOWN:
            blocked, dx, dy = frog.y == BOARD_N, 0, 2
        elif signal is Signal.MOVE_RIGHT:
            blocked, dx, dy = frog.x == BOARD_M, 1, 0
        else:
            blocked, dx, dy = frog.x == 1, -1, 0
        if not blocked:
            self._render("clear_cell", frog)
            frog.x += dx
            frog.y += dy

    def _on_moving(self, signal: Signal) -> None:
        if signal is Signal.ESCAPE_BTN:
            self.state = FrogState.EXIT
            return
        if signal in (Signal.MOVE_UP, Signal.MOVE_DOWN, Signal.MOVE_RIGHT, Signal.MOVE_LEFT):
            self._move(signal)
        if self.board.collides(self.frog):
            self.state = FrogState.COLLIDE
        elif self.board.reached_finish(self.frog):
            self.state = FrogState.REACH
        else:
            self.state = FrogState.SHIFTING

    def _on_shifting(self, signal: Signal) -> None:
        self.board.shift()
        if self.board.collides(self.frog):
            self.state = FrogState.COLLIDE
            return
        self.state = FrogState.MOVING
        self._render("board", self.board, self.frog)
        self._render("stats", self.stats)

    def _on_reach(self, signal: Signal) -> None:
        self.stats.score += 1
        self.board.add_progress()
        if self.board.level_complete():
            self.stats.level += 1
            self.stats.speed += 1
            self.state = FrogState.SPAWN
        else:
            self.frog.reset()
            self._render("finish_line", self.board)
            self.state = FrogState.MOVING

    def _on_collide(self, signal: Signal) -> None:
        if self.stats.lives:
            self.stats.lives -= 1
            self.frog.reset()
            self.state = FrogState.MOVING
        else:
            self.state = FrogState.GAMEOVER

    def _on_gameover(self, signal: Signal) -> None:
        self._render("banner", self.stats)