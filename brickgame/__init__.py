"""Terminal brick games: Tetris and Frogger."""

__version__ = "1.0.0"