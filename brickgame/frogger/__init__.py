"""Frogger: board logic, game state machine and curses front end."""