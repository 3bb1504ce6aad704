"""
Exact game-theoretic search: minimax with alpha-beta pruning.
Values are from X's perspective: X maximizes, O minimizes.
Tie-break policy:
- Moves are tried in row-major order and only a strictly better value replaces
  the current best, so among equally good moves the earliest one is chosen.
- No depth preference: a win is a win regardless of how many plies it takes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from .board import (
    Board,
    Mark,
    Move,
    apply_move,
    current_player,
    is_terminal,
    legal_moves,
    utility,
)

logger = logging.getLogger(__name__)

# Outside the utility range [-1, 1], so they act as -inf/+inf with int compares.
NEG_INF = -2
POS_INF = 2


class SearchResult(NamedTuple):
    value: int
    move: Optional[Move]


@dataclass
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


def max_value(
    board: Board,
    alpha: int = NEG_INF,
    beta: int = POS_INF,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    if stats is not None:
        stats.nodes += 1
    if is_terminal(board):
        return SearchResult(utility(board), None)
    best_val = NEG_INF
    best_move: Optional[Move] = None
    for mv in legal_moves(board):
        val = min_value(apply_move(board, mv), alpha, beta, stats).value
        if val > best_val:
            best_val = val
            best_move = mv
        alpha = max(alpha, best_val)
        if beta <= alpha:
            if stats is not None:
                stats.cutoffs += 1
            break
    return SearchResult(best_val, best_move)


def min_value(
    board: Board,
    alpha: int = NEG_INF,
    beta: int = POS_INF,
    stats: Optional[SearchStats] = None,
) -> SearchResult:
    if stats is not None:
        stats.nodes += 1
    if is_terminal(board):
        return SearchResult(utility(board), None)
    best_val = POS_INF
    best_move: Optional[Move] = None
    for mv in legal_moves(board):
        val = max_value(apply_move(board, mv), alpha, beta, stats).value
        if val < best_val:
            best_val = val
            best_move = mv
        beta = min(beta, best_val)
        if beta <= alpha:
            if stats is not None:
                stats.cutoffs += 1
            break
    return SearchResult(best_val, best_move)


def search(board: Board, stats: Optional[SearchStats] = None) -> SearchResult:
    """Full-window search for the side to move."""
    if current_player(board) is Mark.X:
        return max_value(board, NEG_INF, POS_INF, stats)
    return min_value(board, NEG_INF, POS_INF, stats)


def best_move(board: Board, stats: Optional[SearchStats] = None) -> Optional[Move]:
    """Optimal move for the side to move, or None on a terminal board."""
    if is_terminal(board):
        return None
    if stats is None:
        stats = SearchStats()
    res = search(board, stats)
    logger.debug(
        "to_move=%s best=%s value=%d nodes=%d cutoffs=%d",
        current_player(board).value, res.move, res.value, stats.nodes, stats.cutoffs,
    )
    return res.move


def evaluate(board: Board) -> int:
    """Value of the board under optimal play by both sides (+1 X wins, 0 draw, -1 O wins)."""
    return search(board).value
