"""Terminal front end of the frog-crossing game."""

from __future__ import annotations

import argparse
import curses
import locale
import time
from pathlib import Path

from .board import (
    BOARD_M,
    BOARD_N,
    BOARDS_BEGIN,
    DEFAULT_LEVEL_DIR,
    EMPTY_ROAD,
    HUD_WIDTH,
    MAP_PADDING,
)
from .fsm import FroggerGame, FrogState, get_signal

DEFAULT_BANNER_DIR = "tests/game_progress"
WON_BANNER = "you_won.txt"
LOST_BANNER = "you_lose.txt"
INTRO_MESSAGE = "Press ENTER to start!"
BANNER_N = 10
BANNER_M = 100
BANNER_SECONDS = 2.0
START_TIMEOUT_MS = 50

_FALLBACK_GLYPHS = {
    "ACS_ULCORNER": "+",
    "ACS_URCORNER": "+",
    "ACS_LLCORNER": "+",
    "ACS_LRCORNER": "+",
    "ACS_HLINE": "-",
    "ACS_VLINE": "|",
    "ACS_BLOCK": "#",
}


def _glyph(name: str):
    """Line-drawing character, or a plain one before the terminal is set up."""
    return getattr(curses, name, _FALLBACK_GLYPHS[name])


def read_banner(path) -> list[str]:
    """Read the rows of a banner picture; raises OSError or ValueError."""
    rows = BANNER_N - 1
    with Path(path).open(encoding="latin-1") as handle:
        lines = [line.split("\n", 1)[0][:BANNER_M] for _, line in zip(range(rows), handle)]
    if len(lines) < rows:
        raise ValueError(f"banner {path} has fewer than {rows} rows")
    return lines


class FroggerScreen:
    """Draws the frog game into a curses window."""

    def __init__(self, window, banner_dir=DEFAULT_BANNER_DIR):
        self.window = window
        self.banner_dir = Path(banner_dir)
        self.banner_delay = BANNER_SECONDS

    def _addch(self, y: int, x: int, ch) -> None:
        try:
            self.window.addch(BOARDS_BEGIN + y, BOARDS_BEGIN + x, ch)
        except curses.error:
            pass

    def _addstr(self, y: int, x: int, text: str) -> None:
        try:
            self.window.addstr(BOARDS_BEGIN + y, BOARDS_BEGIN + x, text)
        except curses.error:
            pass

    def overlay(self) -> None:
        """Draw the frames of the board and the statistics panel."""
        self.rectangle(0, BOARD_N + 1, 0, BOARD_M + 1)
        self.rectangle(0, BOARD_N + 1, BOARD_M + 2, BOARD_M + HUD_WIDTH + 3)
        labels = ("LEVEL", "SCORE", "SPEED", "LIVES")
        for top, label in zip((1, 4, 7, 10), labels):
            self.rectangle(top, top + 2, BOARD_M + 3, BOARD_M + HUD_WIDTH + 2)
            self._addstr(top + 1, BOARD_M + 5, label)
        self._addstr(BOARD_N // 2, (BOARD_M - len(INTRO_MESSAGE)) // 2 + 1, INTRO_MESSAGE)

    def level_error(self) -> None:
        self.window.clear()
        self._addstr(0, 0, "An error occured openning level file!")
        self._addstr(2, 0, "Please check ./tests/ directory.")
        self._addstr(3, 0, "There should be 5 level files named level_(1-5).txt.")
        self._addstr(4, 0, "Also try to open the game nearby ./tests/ directory.")
        self._addstr(6, 0, "Press any key to exit.")

    def rectangle(self, top: int, bottom: int, left: int, right: int) -> None:
        hline = _glyph("ACS_HLINE")
        vline = _glyph("ACS_VLINE")
        self._addch(top, left, _glyph("ACS_ULCORNER"))
        for x in range(left + 1, right):
            self._addch(top, x, hline)
        self._addch(top, right, _glyph("ACS_URCORNER"))
        for y in range(top + 1, bottom):
            self._addch(y, left, vline)
            self._addch(y, right, vline)
        self._addch(bottom, left, _glyph("ACS_LLCORNER"))
        for x in range(left + 1, right):
            self._addch(bottom, x, hline)
        self._addch(bottom, right, _glyph("ACS_LRCORNER"))

    def stats(self, stats) -> None:
        values = (stats.level, stats.score, stats.speed, stats.lives)
        for y, value in zip((2, 5, 8, 11), values):
            self._addstr(y, BOARD_M + 12, str(value))

    def board(self, board, frog) -> None:
        """Draw the roads, the verges between them and the frog."""
        block = _glyph("ACS_BLOCK")
        for y in range(MAP_PADDING + 1, BOARD_N - MAP_PADDING + 1):
            if y % 2 == (MAP_PADDING + 1) % 2:
                for x in range(1, BOARD_M + 1):
                    self._addch(y, x, block)
            else:
                road = board.ways[y - MAP_PADDING - 1]
                for x, cell in enumerate(road[:BOARD_M], start=1):
                    self._addch(y, x, " " if cell == EMPTY_ROAD else "]")
        self._addch(frog.y, frog.x, "@")

    def finish_line(self, board) -> None:
        block = _glyph("ACS_BLOCK")
        for x, filled in enumerate(board.finish, start=1):
            self._addch(1, x, block if filled else " ")

    def clear_cell(self, frog) -> None:
        self._addch(frog.y, frog.x, " ")

    def banner(self, stats) -> None:
        """Show the win or loss picture for a while, if it can be read."""
        name = WON_BANNER if stats.lives else LOST_BANNER
        self.window.clear()
        try:
            lines = read_banner(self.banner_dir / name)
        except (OSError, ValueError):
            return
        block = _glyph("ACS_BLOCK")
        for y in range(BANNER_N):
            line = lines[y] if y < len(lines) else ""
            for x in range(BANNER_M):
                self._addch(y, x, block if x < len(line) and line[x] == "#" else " ")
        self.window.refresh()
        time.sleep(self.banner_delay)


def game_loop(window, level_dir=DEFAULT_LEVEL_DIR, banner_dir=DEFAULT_BANNER_DIR) -> FroggerGame:
    """Run the game in the window until it ends; return the final game."""
    screen = FroggerScreen(window, banner_dir)
    screen.overlay()
    game = FroggerGame(level_dir, screen)
    key = 0
    while True:
        last_round = game.finished()
        game.step(get_signal(key))
        if game.wants_input():
            if game.state is FrogState.START:
                window.timeout(START_TIMEOUT_MS)
            else:
                window.timeout(game.stats.timeout())
            key = window.getch()
        if last_round:
            break
    if game.state is FrogState.FILE_ERROR:
        screen.level_error()
        window.nodelay(False)
        window.timeout(-1)
        window.getch()
    return game


def _run(window, level_dir, banner_dir) -> FroggerGame:
    window.keypad(True)
    window.timeout(START_TIMEOUT_MS)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    return game_loop(window, level_dir, banner_dir)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="frogger", description="Frog-crossing game.")
    parser.add_argument("--levels", default=DEFAULT_LEVEL_DIR, help="directory of level files")
    parser.add_argument(
        "--banners", default=DEFAULT_BANNER_DIR, help="directory of the win and loss pictures"
    )
    args = parser.parse_args(argv)
    locale.setlocale(locale.LC_ALL, "")
    try:
        curses.wrapper(_run, args.levels, args.banners)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())