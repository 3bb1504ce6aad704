"""
Board state model: marks, the immutable 3x3 board, moves, and outcomes.
Teaching notes:
- A Board is a value. Every transition returns a new Board; nothing is mutated.
- Whose turn it is comes from the mark counts. X always starts, so an even
  number of occupied cells means X to move.
- Outcome is derived from the grid on demand and never stored.
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

SIZE = 3


class Mark(Enum):
    EMPTY = ""
    X = "X"
    O = "O"

    def opponent(self) -> "Mark":
        if self is Mark.X:
            return Mark.O
        if self is Mark.O:
            return Mark.X
        return Mark.EMPTY


class Outcome(Enum):
    X_WINS = "x_wins"
    O_WINS = "o_wins"
    DRAW = "draw"
    IN_PROGRESS = "in_progress"


class Move(NamedTuple):
    row: int
    col: int


# Rows top to bottom, columns left to right, then the two diagonals.
WIN_LINES: Tuple[Tuple[Move, Move, Move], ...] = (
    (Move(0, 0), Move(0, 1), Move(0, 2)),
    (Move(1, 0), Move(1, 1), Move(1, 2)),
    (Move(2, 0), Move(2, 1), Move(2, 2)),
    (Move(0, 0), Move(1, 0), Move(2, 0)),
    (Move(0, 1), Move(1, 1), Move(2, 1)),
    (Move(0, 2), Move(1, 2), Move(2, 2)),
    (Move(0, 0), Move(1, 1), Move(2, 2)),
    (Move(0, 2), Move(1, 1), Move(2, 0)),
)

_CODES = {Mark.EMPTY: "0", Mark.X: "1", Mark.O: "2"}
_PARSE = {
    "0": Mark.EMPTY, ".": Mark.EMPTY, "-": Mark.EMPTY, "_": Mark.EMPTY, " ": Mark.EMPTY,
    "1": Mark.X, "x": Mark.X, "X": Mark.X,
    "2": Mark.O, "o": Mark.O, "O": Mark.O,
}


class InvalidMoveError(ValueError):
    """Raised by apply_move for out-of-range coordinates or an occupied cell."""

    def __init__(self, move: Tuple[int, int], reason: str):
        self.move = move
        self.reason = reason
        shown = tuple(move) if isinstance(move, tuple) else move
        if reason == "out_of_range":
            msg = f"Invalid move {shown!r}: coordinates must be integers in 0-{SIZE - 1}"
        else:
            msg = f"Invalid move {shown!r}: cell is already occupied"
        super().__init__(msg)


@dataclass(frozen=True)
class Board:
    """3x3 grid of marks stored row-major as a flat tuple of 9 cells."""

    cells: Tuple[Mark, ...] = (Mark.EMPTY,) * (SIZE * SIZE)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Mark]]) -> "Board":
        return cls(tuple(cell for row in rows for cell in row))

    @property
    def rows(self) -> Tuple[Tuple[Mark, ...], ...]:
        return tuple(self.cells[r * SIZE:(r + 1) * SIZE] for r in range(SIZE))

    def __getitem__(self, pos: Tuple[int, int]) -> Mark:
        row, col = pos
        return self.cells[row * SIZE + col]

    def count(self, mark: Mark) -> int:
        return self.cells.count(mark)

    def occupied_count(self) -> int:
        return SIZE * SIZE - self.cells.count(Mark.EMPTY)

    def __str__(self) -> str:
        return "\n".join("|".join(c.value or " " for c in row) for row in self.rows)


class WinningLine(NamedTuple):
    mark: Mark
    cells: Tuple[Move, Move, Move]


@dataclass(frozen=True)
class MoveResult:
    """Outcome of try_apply_move: the new board, or the unchanged board and an error."""

    board: Board
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def initial_board() -> Board:
    return Board()


def current_player(board: Board) -> Mark:
    return Mark.X if board.occupied_count() % 2 == 0 else Mark.O


def legal_moves(board: Board) -> List[Move]:
    return [Move(i // SIZE, i % SIZE) for i, v in enumerate(board.cells) if v is Mark.EMPTY]


def apply_move(board: Board, move: Tuple[int, int]) -> Board:
    # non-integral coordinates (1.0, "1") and pairs of the wrong length are out of range
    try:
        row, col = (operator.index(v) for v in move)
    except (TypeError, ValueError):
        raise InvalidMoveError(move, "out_of_range") from None
    if row not in range(SIZE) or col not in range(SIZE):
        raise InvalidMoveError(move, "out_of_range")
    idx = row * SIZE + col
    if board.cells[idx] is not Mark.EMPTY:
        raise InvalidMoveError(move, "occupied")
    cells = list(board.cells)
    cells[idx] = current_player(board)
    return Board(tuple(cells))


def try_apply_move(board: Board, move: Tuple[int, int]) -> MoveResult:
    try:
        return MoveResult(board=apply_move(board, move))
    except InvalidMoveError as e:
        return MoveResult(board=board, error=str(e))


def winning_line(board: Board) -> Optional[WinningLine]:
    for line in WIN_LINES:
        a, b, c = (board[pos] for pos in line)
        if a is not Mark.EMPTY and a is b and a is c:
            return WinningLine(a, line)
    return None


def is_terminal(board: Board) -> bool:
    return winning_line(board) is not None or Mark.EMPTY not in board.cells


def outcome(board: Board) -> Outcome:
    line = winning_line(board)
    if line is not None:
        return Outcome.X_WINS if line.mark is Mark.X else Outcome.O_WINS
    if Mark.EMPTY not in board.cells:
        return Outcome.DRAW
    return Outcome.IN_PROGRESS


def utility(board: Board) -> int:
    """+1 if X has won, -1 if O has won, 0 otherwise."""
    line = winning_line(board)
    if line is None:
        return 0
    return 1 if line.mark is Mark.X else -1


def serialize_board(board: Board) -> str:
    return ''.join(_CODES[c] for c in board.cells)


def parse_board(text: str) -> Board:
    """Parse a 9-character row-major board string (0/1/2, or ./X/O)."""
    raw = text.strip("\n")
    if len(raw) != SIZE * SIZE:
        raise ValueError(f"Board string must have {SIZE * SIZE} characters, got {len(raw)}")
    try:
        return Board(tuple(_PARSE[ch] for ch in raw))
    except KeyError as e:
        raise ValueError(f"Unknown board character: {e.args[0]!r}") from None


def is_valid_state(board: Board) -> bool:
    x_count, o_count = board.count(Mark.X), board.count(Mark.O)
    if not (x_count == o_count or x_count == o_count + 1):
        return False

    def count_wins(mark: Mark) -> int:
        return sum(1 for line in WIN_LINES if all(board[pos] is mark for pos in line))

    x_wins, o_wins = count_wins(Mark.X), count_wins(Mark.O)
    if x_wins and o_wins:
        return False
    if x_wins and x_count != o_count + 1:
        return False
    if o_wins and x_count != o_count:
        return False
    return True


def boards_from_moves(moves: Iterable[Tuple[int, int]], start: Optional[Board] = None) -> List[Board]:
    """Apply moves in order and return every board along the way, start included."""
    board = start if start is not None else initial_board()
    history = [board]
    for mv in moves:
        board = apply_move(board, mv)
        history.append(board)
    return history
