import pytest

from tictactoe_engine.board import Mark, Move, initial_board, parse_board, serialize_board
from tictactoe_engine.symmetry import (
    ALL_SYMS,
    canonical_form,
    orbit_size,
    transform_board,
    transform_move,
)


def test_move_transform_round_trip():
    # In dihedral group, each element is its own inverse except 90/270 rotations.
    inverse = {
        'id': 'id',
        'rot90': 'rot270',
        'rot180': 'rot180',
        'rot270': 'rot90',
        'hflip': 'hflip',
        'vflip': 'vflip',
        'd1': 'd1',
        'd2': 'd2',
    }
    for k, inv in inverse.items():
        for r in range(3):
            for c in range(3):
                assert transform_move(transform_move((r, c), k), inv) == (r, c)


def test_rot90_moves_top_left_to_top_right():
    b = parse_board("X........")
    assert transform_board(b, 'rot90')[0, 2] is Mark.X
    assert transform_move((0, 0), 'rot90') == Move(0, 2)


def test_board_and_move_transform_agree():
    b = parse_board("XO..X...O")
    for k in ALL_SYMS:
        tb = transform_board(b, k)
        for r in range(3):
            for c in range(3):
                assert tb[transform_move((r, c), k)] is b[r, c]


def test_canonical_is_lexicographically_minimum():
    b = parse_board("102010200")
    images = [serialize_board(transform_board(b, k)) for k in ALL_SYMS]
    form, op = canonical_form(b)
    assert form == min(images)
    assert serialize_board(transform_board(b, op)) == form


def test_orbit_sizes():
    assert orbit_size(initial_board()) == 1
    assert orbit_size(parse_board("....X....")) == 1
    assert orbit_size(parse_board("X........")) == 4
    assert orbit_size(parse_board(".X.......")) == 4


def test_unknown_transform_rejected():
    with pytest.raises(ValueError):
        transform_board(initial_board(), 'shear')
    with pytest.raises(ValueError):
        transform_move((0, 0), 'shear')
