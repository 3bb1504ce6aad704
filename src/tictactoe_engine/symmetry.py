"""
Symmetry and canonicalization for Tic-Tac-Toe.
Teaching notes:
- There are 8 symmetries (the dihedral group of the square). Optimal play is
  invariant under all of them, which makes them a cheap check on the search.
- We canonicalize a board by taking the lexicographically smallest image among all symmetries.
- Moves transform with the board; we precompute coordinate maps.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Dict, Tuple

import numpy as np

from .board import SIZE, Board, Move, serialize_board

ALL_SYMS = ['id', 'rot90', 'rot180', 'rot270', 'hflip', 'vflip', 'd1', 'd2']


def _transform_grid(grid: np.ndarray, kind: str) -> np.ndarray:
    if kind == 'id':
        return grid.copy()
    elif kind == 'rot90':
        return np.rot90(grid, k=-1)
    elif kind == 'rot180':
        return np.rot90(grid, k=2)
    elif kind == 'rot270':
        return np.rot90(grid, k=1)
    elif kind == 'hflip':
        return np.fliplr(grid)
    elif kind == 'vflip':
        return np.flipud(grid)
    elif kind == 'd1':
        return grid.T
    elif kind == 'd2':
        return np.rot90(grid, k=2).T
    else:
        raise ValueError(f"Unknown transformation: {kind}")


def transform_board(board: Board, kind: str) -> Board:
    grid = np.array(board.cells, dtype=object).reshape(SIZE, SIZE)
    out = _transform_grid(grid, kind)
    return Board(tuple(out.flatten().tolist()))


def _move_map(kind: str) -> Dict[Move, Move]:
    index = np.arange(SIZE * SIZE).reshape(SIZE, SIZE)
    out = _transform_grid(index, kind)
    mapping = {}
    for r in range(SIZE):
        for c in range(SIZE):
            src = int(out[r, c])
            mapping[Move(src // SIZE, src % SIZE)] = Move(r, c)
    return mapping


SYMM_MOVE_MAPS = {k: _move_map(k) for k in ALL_SYMS}


def transform_move(move: Tuple[int, int], kind: str) -> Move:
    if kind not in SYMM_MOVE_MAPS:
        raise ValueError(f"Unknown transformation: {kind}")
    return SYMM_MOVE_MAPS[kind][Move(*move)]


@lru_cache(maxsize=None)
def canonical_form(board: Board) -> Tuple[str, str]:
    """Smallest serialized image of the board and the symmetry producing it."""
    images = [(serialize_board(transform_board(board, k)), k) for k in ALL_SYMS]
    return min(images, key=lambda x: x[0])


def orbit_size(board: Board) -> int:
    return len({serialize_board(transform_board(board, k)) for k in ALL_SYMS})
