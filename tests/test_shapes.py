import pytest

from brickgame.tetris.shapes import (
    BLOCKS,
    ROTATIONS,
    TETROMINOS,
    Location,
    tetromino_cell,
    tetromino_cells,
)

ALL_SHAPES = [(k, r) for k in range(TETROMINOS) for r in range(ROTATIONS)]


def test_straight_piece_first_rotation():
    assert tetromino_cells(0, 0) == (
        Location(1, 0),
        Location(1, 1),
        Location(1, 2),
        Location(1, 3),
    )


@pytest.mark.parametrize("kind,rotation", ALL_SHAPES)
def test_every_shape_has_four_distinct_cells(kind, rotation):
    cells = tetromino_cells(kind, rotation)
    assert len(cells) == BLOCKS
    assert len(set(cells)) == BLOCKS


@pytest.mark.parametrize("kind,rotation", ALL_SHAPES)
def test_cells_fit_in_four_by_four_box(kind, rotation):
    for cell in tetromino_cells(kind, rotation):
        assert 0 <= cell.row < 4
        assert 0 <= cell.column < 4


@pytest.mark.parametrize("kind,rotation", ALL_SHAPES)
def test_single_cell_matches_cell_list(kind, rotation):
    cells = tetromino_cells(kind, rotation)
    assert tuple(tetromino_cell(kind, rotation, b) for b in range(BLOCKS)) == cells


def test_square_piece_is_the_same_in_every_rotation():
    first = tetromino_cells(3, 0)
    assert all(tetromino_cells(3, r) == first for r in range(ROTATIONS))


def test_rotations_differ_for_non_square_pieces():
    for kind in range(TETROMINOS):
        if kind == 3:
            continue
        rotations = {frozenset(tetromino_cells(kind, r)) for r in range(ROTATIONS)}
        assert len(rotations) > 1


@pytest.mark.parametrize(
    "kind,rotation,block",
    [(TETROMINOS, 0, 0), (-1, 0, 0), (0, ROTATIONS, 0), (0, -1, 0), (0, 0, BLOCKS)],
)
def test_out_of_range_arguments_raise(kind, rotation, block):
    with pytest.raises(ValueError):
        tetromino_cell(kind, rotation, block)


def test_location_is_hashable_and_compares_by_value():
    assert Location(2, 3) == Location(2, 3)
    assert len({Location(2, 3), Location(2, 3)}) == 1