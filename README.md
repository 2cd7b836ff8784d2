# brickgame

Two small games for the terminal, drawn with curses:

- **Tetris**: a 10 × 20 field, seven tetrominoes, a preview of the next
  piece, scoring, levels and a saved high score.
- **Frogger**: guide a frog across lanes of moving cars to the finish line
  through five levels, driven by a finite state machine.

Both need a terminal that curses can drive (Linux, macOS or another POSIX
system). There are no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Tetris

```
brickgame-tetris [--save FILE]
```

Keys:

| Key         | Action                                   |
|-------------|------------------------------------------|
| `s`         | start the game, then pause / resume      |
| ← / →       | move the piece left / right              |
| ↓           | drop the piece to the bottom             |
| `r`         | rotate the piece                         |
| `q`         | end the current game                     |
| `y` / `n`   | after game over: play again / quit       |

Each cleared line scores points; clearing several lines at once is worth
more (100, 200, 400, 800). Every 600 points raises the level, and higher
levels make pieces fall faster, up to level 10. A piece that cannot be
placed when it appears ends the game.

The high score is read from the save file (`Tetris.save` in the working
directory unless `--save` names another) when a game starts, and written
back when you quit with `n` after a game over. Leaving with Ctrl-C does not
save it.

## Frogger

```
brickgame-frogger [--levels DIR] [--banners DIR]
```

Press Enter to start and Escape to leave. Move the frog with the arrow
keys. Touching a car costs a life; you start with nine, and a collision with
none left ends the game. Each crossing fills a fifth of the finish line, and
a full finish line takes you to the next, faster level. After the fifth
level, or when the lives run out, a banner tells you whether you won or lost.

Levels are read from `level_1.txt` to `level_5.txt` in the levels directory
(default `tests/levels`, relative to the working directory). Each file must
hold at least 21 lines of the road map, where `]` marks a car and `0` an
empty stretch of road; the odd-numbered roads move one cell to the right on
every step. If a level file cannot be read, the game shows an error and
waits for a key before exiting.

The won and lost pictures are read from `you_won.txt` and `you_lose.txt` in
the banners directory (default `tests/game_progress`); a `#` in them is
drawn as a solid block. If a picture cannot be read, no banner is shown.

## Using the engines from Python

The game logic can be driven without a terminal:

```python
from brickgame.tetris.engine import TetrisGame, UserAction

game = TetrisGame("Tetris.save")
game.start()
game.user_input(UserAction.LEFT, True)
game.tick()
print(game.score, game.level)
```

`TetrisGame.quit` saves the high score and raises `QuitRequested`.
`brickgame.tetris.shapes` holds the tetromino geometry
(`tetromino_cells`, `tetromino_cell`).

For Frogger, `brickgame.frogger.fsm.FroggerGame(level_dir, view)` runs the
state machine one signal at a time through `step`, which returns the new
`FrogState`; `get_signal` turns curses key codes into `Signal` values, and
`finished` and `wants_input` tell a loop when to stop and when to read a
key. The view may be `None`. `brickgame.frogger.board` holds the `Board`,
`Position` and `GameStats` the machine works on.

## What is not included

The package ships no Frogger level files and no banner pictures; supply
your own in the format described above before playing.