"""tictactoe_engine package.

Immutable board model and an unbeatable minimax (alpha-beta) opponent,
plus symmetry helpers, position analysis, and a small CLI.

Convenience imports are exposed for common workflows.
"""

from .board import (
    Board,
    InvalidMoveError,
    Mark,
    Move,
    MoveResult,
    Outcome,
    WinningLine,
    apply_move,
    current_player,
    initial_board,
    is_terminal,
    legal_moves,
    outcome,
    try_apply_move,
    winning_line,
)
from .search import best_move, evaluate

__all__ = [
    "Board",
    "InvalidMoveError",
    "Mark",
    "Move",
    "MoveResult",
    "Outcome",
    "WinningLine",
    "apply_move",
    "best_move",
    "current_player",
    "evaluate",
    "initial_board",
    "is_terminal",
    "legal_moves",
    "outcome",
    "try_apply_move",
    "winning_line",
]
