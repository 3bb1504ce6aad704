"""
Position analysis built on the search engine: per-move values, the set of
optimal moves, reachable-state enumeration, and games played by the engine.
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List, Optional

import numpy as np

from .board import (
    Board,
    Mark,
    Move,
    apply_move,
    current_player,
    initial_board,
    is_terminal,
    legal_moves,
)
from .search import best_move, evaluate

logger = logging.getLogger(__name__)


def move_values(board: Board) -> Dict[Move, int]:
    """Exact value (X-positive) of the child reached by each legal move."""
    if is_terminal(board):
        return {}
    return {mv: evaluate(apply_move(board, mv)) for mv in legal_moves(board)}


def optimal_moves(board: Board) -> List[Move]:
    values = move_values(board)
    if not values:
        return []
    pick = max if current_player(board) is Mark.X else min
    target = pick(values.values())
    return [mv for mv, v in values.items() if v == target]


def reachable_boards() -> List[Board]:
    """Enumerate all states reachable from the empty board."""
    start = initial_board()
    q = deque([start])
    seen = {start}
    out: List[Board] = []
    while q:
        s = q.popleft()
        out.append(s)
        if is_terminal(s):
            continue
        for mv in legal_moves(s):
            child = apply_move(s, mv)
            if child not in seen:
                seen.add(child)
                q.append(child)
    return out


def self_play(first: Optional[Board] = None) -> List[Board]:
    """Engine plays both sides until the game ends."""
    board = first if first is not None else initial_board()
    history = [board]
    while not is_terminal(board):
        board = apply_move(board, best_move(board))
        history.append(board)
    return history


def play_out(engine_mark: Mark, seed: Optional[int] = None) -> List[Board]:
    """Engine plays engine_mark; the other side picks uniformly random legal moves."""
    if engine_mark not in (Mark.X, Mark.O):
        raise ValueError(f"Engine must play X or O, got {engine_mark!r}")
    rng = np.random.default_rng(seed)
    board = initial_board()
    history = [board]
    while not is_terminal(board):
        if current_player(board) is engine_mark:
            mv = best_move(board)
        else:
            moves = legal_moves(board)
            mv = moves[int(rng.integers(len(moves)))]
        board = apply_move(board, mv)
        history.append(board)
    logger.debug("play_out engine=%s plies=%d", engine_mark.value, len(history) - 1)
    return history
