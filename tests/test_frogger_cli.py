import pytest

from brickgame.frogger.board import (
    BOARD_M,
    BOARD_N,
    BOARDS_BEGIN,
    COLS_MAP,
    LEVEL_COUNT,
    MAP_PADDING,
    PROGRESS_STEP,
    ROWS_MAP,
    Board,
    GameStats,
    Position,
)
from brickgame.frogger.cli import BANNER_M, BANNER_N, FroggerScreen, game_loop, read_banner
from brickgame.frogger.fsm import FrogState


class FakeWindow:
    def __init__(self, keys=()):
        self.cells = {}
        self.texts = {}
        self.keys = list(keys)
        self.clears = 0
        self.refreshes = 0
        self.timeouts = []

    def addch(self, y, x, ch, attr=0):
        self.cells[(y, x)] = ch

    def addstr(self, y, x, text):
        self.texts[(y, x)] = text

    def clear(self):
        self.clears += 1
        self.cells.clear()
        self.texts.clear()

    def refresh(self):
        self.refreshes += 1

    def getch(self):
        return self.keys.pop(0) if self.keys else -1

    def timeout(self, ms):
        self.timeouts.append(ms)

    def nodelay(self, flag):
        pass


def at(window, y, x):
    return window.cells.get((y + BOARDS_BEGIN, x + BOARDS_BEGIN))


def make_levels(directory):
    for level in range(1, LEVEL_COUNT + 1):
        lines = ["0" * COLS_MAP for _ in range(ROWS_MAP)]
        (directory / f"level_{level}.txt").write_text("\n".join(lines) + "\n")


def test_read_banner(tmp_path):
    path = tmp_path / "you_won.txt"
    path.write_text("".join(f"#{i}\n" for i in range(BANNER_N + 2)))
    lines = read_banner(path)
    assert len(lines) == BANNER_N - 1
    assert lines[0] == "#0"
    assert all("\n" not in line for line in lines)


def test_read_banner_short_file(tmp_path):
    path = tmp_path / "you_won.txt"
    path.write_text("#\n#\n")
    with pytest.raises(ValueError):
        read_banner(path)


def test_read_banner_missing(tmp_path):
    with pytest.raises(OSError):
        read_banner(tmp_path / "missing.txt")


def test_rectangle_draws_perimeter_only():
    window = FakeWindow()
    FroggerScreen(window).rectangle(0, 3, 0, 5)
    assert len(window.cells) == 2 * 6 + 2 * 2
    assert at(window, 1, 1) is None
    assert at(window, 0, 0) == at(window, 3, 5)


def test_stats():
    window = FakeWindow()
    FroggerScreen(window).stats(GameStats(score=7, level=3, speed=2, lives=4))
    col = BOARD_M + 12 + BOARDS_BEGIN
    assert window.texts[(2 + BOARDS_BEGIN, col)] == "3"
    assert window.texts[(5 + BOARDS_BEGIN, col)] == "7"
    assert window.texts[(11 + BOARDS_BEGIN, col)] == "4"


def test_finish_line():
    window = FakeWindow()
    board = Board()
    board.add_progress()
    FroggerScreen(window).finish_line(board)
    filled = [at(window, 1, x) for x in range(1, BOARD_M + 1)]
    assert filled[PROGRESS_STEP:] == [" "] * (BOARD_M - PROGRESS_STEP)
    assert " " not in filled[:PROGRESS_STEP]


def test_clear_cell():
    window = FakeWindow()
    screen = FroggerScreen(window)
    frog = Position(4, 9)
    screen.board(Board(), frog)
    screen.clear_cell(frog)
    assert at(window, 9, 4) == " "


def test_banner_draws_picture(tmp_path):
    rows = ["#" + " " * 5 + "#"] * BANNER_N
    (tmp_path / "you_won.txt").write_text("\n".join(rows) + "\n")
    window = FakeWindow()
    screen = FroggerScreen(window, tmp_path)
    screen.banner_delay = 0
    screen.banner(GameStats(lives=3))
    assert len(window.cells) == BANNER_N * BANNER_M
    assert at(window, 0, 1) == " "
    assert at(window, 0, 0) == at(window, 0, 6)
    assert at(window, 0, 0) != " "
    assert window.refreshes == 1


def test_banner_missing_file_only_clears(tmp_path):
    window = FakeWindow()
    FroggerScreen(window, tmp_path).banner(GameStats(lives=0))
    assert window.clears == 1
    assert window.cells == {}
    assert window.refreshes == 0


def test_level_error():
    window = FakeWindow()
    FroggerScreen(window).level_error()
    assert window.clears == 1
    assert window.texts[(BOARDS_BEGIN, BOARDS_BEGIN)].startswith("An error")


def test_overlay_intro():
    window = FakeWindow()
    FroggerScreen(window).overlay()
    texts = list(window.texts.values())
    assert "Press ENTER to start!" in texts
    assert "LIVES" in texts


def test_game_loop_escape(tmp_path):
    window = FakeWindow(keys=[27])
    game = game_loop(window, tmp_path, tmp_path)
    assert game.state is FrogState.EXIT


def test_game_loop_missing_levels(tmp_path):
    window = FakeWindow(keys=[10])
    game = game_loop(window, tmp_path / "none", tmp_path)
    assert game.state is FrogState.FILE_ERROR
    assert window.clears == 1
    assert window.timeouts[-1] == -1