"""Tetris: tetromino shapes, game engine and curses front end."""