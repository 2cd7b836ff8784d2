"""Tetromino geometry and the dimensions of the playing field."""

from __future__ import annotations

from dataclasses import dataclass

WIDTH = 10
HEIGHT = 20
TETROMINOS = 7
ROTATIONS = 4
BLOCKS = 4


@dataclass(frozen=True)
class Location:
    """A cell on the field, counted from the top-left corner."""

    row: int
    column: int


_RAW_SHAPES = (
    (
        ((1, 0), (1, 1), (1, 2), (1, 3)),
        ((0, 2), (1, 2), (2, 2), (3, 2)),
        ((3, 0), (3, 1), (3, 2), (3, 3)),
        ((0, 1), (1, 1), (2, 1), (3, 1)),
    ),
    (
        ((0, 0), (1, 0), (1, 1), (1, 2)),
        ((0, 1), (0, 2), (1, 1), (2, 1)),
        ((1, 0), (1, 1), (1, 2), (2, 2)),
        ((0, 1), (1, 1), (2, 0), (2, 1)),
    ),
    (
        ((0, 2), (1, 0), (1, 1), (1, 2)),
        ((0, 1), (1, 1), (2, 1), (2, 2)),
        ((1, 0), (1, 1), (1, 2), (2, 0)),
        ((0, 0), (0, 1), (1, 1), (2, 1)),
    ),
    (
        ((0, 1), (0, 2), (1, 1), (1, 2)),
        ((0, 1), (0, 2), (1, 1), (1, 2)),
        ((0, 1), (0, 2), (1, 1), (1, 2)),
        ((0, 1), (0, 2), (1, 1), (1, 2)),
    ),
    (
        ((0, 1), (0, 2), (1, 0), (1, 1)),
        ((0, 1), (1, 1), (1, 2), (2, 2)),
        ((1, 1), (1, 2), (2, 0), (2, 1)),
        ((0, 0), (1, 0), (1, 1), (2, 1)),
    ),
    (
        ((0, 1), (1, 0), (1, 1), (1, 2)),
        ((0, 1), (1, 1), (1, 2), (2, 1)),
        ((1, 0), (1, 1), (1, 2), (2, 1)),
        ((0, 1), (1, 0), (1, 1), (2, 1)),
    ),
    (
        ((0, 0), (0, 1), (1, 1), (1, 2)),
        ((0, 2), (1, 1), (1, 2), (2, 1)),
        ((1, 0), (1, 1), (2, 1), (2, 2)),
        ((0, 1), (1, 0), (1, 1), (2, 0)),
    ),
)

_SHAPES = tuple(
    tuple(tuple(Location(row, column) for row, column in rotation) for rotation in kind)
    for kind in _RAW_SHAPES
)


def tetromino_cells(kind: int, rotation: int) -> tuple[Location, ...]:
    """Return the four cells of a tetromino in the given rotation."""
    if not 0 <= kind < TETROMINOS:
        raise ValueError(f"unknown tetromino kind: {kind}")
    if not 0 <= rotation < ROTATIONS:
        raise ValueError(f"unknown rotation: {rotation}")
    return _SHAPES[kind][rotation]


def tetromino_cell(kind: int, rotation: int, block: int) -> Location:
    """Return one block of a tetromino in the given rotation."""
    cells = tetromino_cells(kind, rotation)
    if not 0 <= block < BLOCKS:
        raise ValueError(f"unknown block index: {block}")
    return cells[block]