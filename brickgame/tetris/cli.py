"""Terminal front end of the falling-blocks game."""

from __future__ import annotations

import argparse
import curses
import signal
import time

from .engine import DEFAULT_SAVE, QuitRequested, TetrisGame, UserAction
from .shapes import BLOCKS, HEIGHT, WIDTH

UI_WIDTH = 12
BORDER = 2
TICK_SECONDS = 0.05
INPUT_TIMEOUT_MS = 50
NO_KEY = -1

_FALLBACK_GLYPHS = {
    "ACS_ULCORNER": "+",
    "ACS_URCORNER": "+",
    "ACS_LLCORNER": "+",
    "ACS_LRCORNER": "+",
    "ACS_HLINE": "-",
    "ACS_VLINE": "|",
}

_KEY_ACTIONS = {
    ord("r"): UserAction.ACTION,
    ord("R"): UserAction.ACTION,
    curses.KEY_DOWN: UserAction.DOWN,
    curses.KEY_LEFT: UserAction.LEFT,
    curses.KEY_RIGHT: UserAction.RIGHT,
    ord("q"): UserAction.TERMINATE,
    ord("Q"): UserAction.TERMINATE,
}


def _glyph(name: str):
    """Line-drawing character, or a plain one before the terminal is set up."""
    return getattr(curses, name, _FALLBACK_GLYPHS[name])


def _color_pair(number: int) -> int:
    try:
        return curses.color_pair(number)
    except curses.error:
        return 0


def parse_key(game: TetrisGame, key: int) -> UserAction | None:
    """Turn a key code into a player action.

    The y and n keys answer the game-over question directly and yield no action;
    n while the game is over saves the high score and raises QuitRequested.
    """
    if key in (ord("s"), ord("S")):
        return UserAction.PAUSE if game.started else UserAction.START
    if key in _KEY_ACTIONS:
        return _KEY_ACTIONS[key]
    if key in (ord("n"), ord("N")):
        if game.stopped:
            game.quit()
        return None
    if key in (ord("y"), ord("Y")):
        if game.stopped:
            game.play_again()
        return None
    return UserAction.UP


class TetrisScreen:
    """Draws the game state into a curses window."""

    def __init__(self, window, game: TetrisGame):
        self.window = window
        self.game = game
        self.block_attr = curses.A_REVERSE | _color_pair(1)

    def _addch(self, y: int, x: int, ch, attr: int = curses.A_NORMAL) -> None:
        try:
            self.window.addch(BORDER + y, BORDER + x, ch, attr)
        except curses.error:
            pass

    def _addstr(self, y: int, x: int, text: str) -> None:
        try:
            self.window.addstr(BORDER + y, BORDER + x, text)
        except curses.error:
            pass

    def _rectangle(self, top: int, bottom: int, left: int, right: int) -> None:
        hline = _glyph("ACS_HLINE")
        vline = _glyph("ACS_VLINE")
        self._addch(top, left, _glyph("ACS_ULCORNER"))
        self._addch(top, right, _glyph("ACS_URCORNER"))
        self._addch(bottom, left, _glyph("ACS_LLCORNER"))
        self._addch(bottom, right, _glyph("ACS_LRCORNER"))
        for x in range(left + 1, right):
            self._addch(top, x, hline)
            self._addch(bottom, x, hline)
        for y in range(top + 1, bottom):
            self._addch(y, left, vline)
            self._addch(y, right, vline)

    @staticmethod
    def _centered(template: str) -> int:
        return int((WIDTH - len(template)) / 2) + 5

    def draw(self) -> None:
        """Redraw whatever the current phase of the game shows."""
        game = self.game
        if game.started and not game.stopped:
            self.window.clear()
            self.draw_frame()
            self.draw_field()
            self.draw_next()
        elif not game.started:
            self.draw_start_message()
        else:
            self.draw_game_over()
        self.window.refresh()

    def draw_start_message(self) -> None:
        self._addstr(HEIGHT // 2, int((WIDTH - 21) / 2) + 6, "Press S to start!")

    def draw_frame(self) -> None:
        """Draw the borders of the field and the side panel with the statistics."""
        game = self.game
        self._rectangle(0, HEIGHT + 1, 0, HEIGHT + 1)
        self._rectangle(0, HEIGHT + 1, HEIGHT + 2, HEIGHT + UI_WIDTH + 3)
        for top, bottom in ((1, 8), (9, 11), (12, 15), (16, 19)):
            self._rectangle(top, bottom, HEIGHT + 3, HEIGHT + UI_WIDTH + 2)
        text_x = HEIGHT + 5
        self._addstr(2, text_x, " NEXT")
        self._addstr(10, text_x, f" LEVEL {game.level}")
        self._addstr(13, text_x, " SCORE")
        self._addstr(14, text_x, f" {game.score}")
        self._addstr(17, text_x, "HI_SCORE")
        self._addstr(18, text_x, f" {game.high_score}")

    def draw_field(self) -> None:
        """Draw every cell of the field, two characters wide."""
        for row, cells in enumerate(self.game.field):
            for column, cell in enumerate(cells):
                attr = self.block_attr if cell == 1 else curses.A_NORMAL
                self._addch(row + 1, column * 2 + 1, " ", attr)
                self._addch(row + 1, column * 2 + 2, " ", attr)

    def draw_next(self) -> None:
        """Draw the preview of the next figure in the side panel."""
        start_y = 4
        start_x = HEIGHT + 4
        for y in range(start_y, start_y + BLOCKS):
            for x in range(start_x, start_x + (BLOCKS + 1) * 2):
                self._addch(y, x, " ")
        for block in self.game.next:
            y = block.location.row + start_y + 1
            x = block.location.column * 2 + start_x
            self._addch(y, x + 1, " ", self.block_attr)
            self._addch(y, x + 2, " ", self.block_attr)

    def draw_game_over(self) -> None:
        game = self.game
        self.window.clear()
        middle = HEIGHT // 2
        self._addstr(middle - 3, self._centered("GAME OVER"), "GAME OVER")
        self._addstr(
            middle - 2, self._centered("Your score is %d"), f"Your score is {game.score}"
        )
        self._addstr(
            middle - 1, self._centered("Highscore is %d"), f"Highscore is {game.high_score}"
        )
        self._addstr(middle, self._centered("Play again? [y/n]"), "Play again? [y/n]")


def _setup_terminal(window) -> None:
    window.keypad(True)
    window.timeout(INPUT_TIMEOUT_MS)
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    try:
        curses.start_color()
        curses.init_pair(1, curses.COLOR_MAGENTA, curses.COLOR_BLACK)
    except curses.error:
        pass


def run(window, save_path=DEFAULT_SAVE) -> TetrisGame:
    """Play in the given window until the player quits; return the final game."""
    _setup_terminal(window)
    game = TetrisGame(save_path)
    screen = TetrisScreen(window, game)
    last_tick = time.monotonic()
    try:
        while True:
            hold = game.started
            key = window.getch()
            if key != NO_KEY:
                action = parse_key(game, key)
                if action is not None:
                    game.user_input(action, hold)
            now = time.monotonic()
            if now - last_tick >= TICK_SECONDS:
                last_tick = now
                game.tick()
                screen.draw()
    except QuitRequested:
        return game


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="tetris", description="Falling-blocks game.")
    parser.add_argument("--save", default=DEFAULT_SAVE, help="file holding the high score")
    args = parser.parse_args(argv)
    if hasattr(signal, "SIGTSTP"):
        signal.signal(signal.SIGTSTP, signal.SIG_IGN)
    try:
        curses.wrapper(run, args.save)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())