from typing import List

import pytest
try:
    from hypothesis import given, settings, strategies as st  # type: ignore
    HAS_HYP = True
except ModuleNotFoundError:  # pragma: no cover - test infra
    HAS_HYP = False
    import pytest as _pytest  # type: ignore
    _pytest.skip("Hypothesis not installed", allow_module_level=True)

from tictactoe_engine.board import (
    InvalidMoveError,
    Mark,
    Move,
    apply_move,
    current_player,
    initial_board,
    is_terminal,
    is_valid_state,
    legal_moves,
    try_apply_move,
)
from tictactoe_engine.search import best_move, evaluate
from tictactoe_engine.symmetry import ALL_SYMS, transform_board


def _play(order: List[int], plies: int):
    """Apply moves from a permutation of cells, stopping at terminal boards."""
    b = initial_board()
    history = [b]
    for idx in order[:plies]:
        if is_terminal(b):
            break
        b = apply_move(b, Move(idx // 3, idx % 3))
        history.append(b)
    return history


games = st.tuples(st.permutations(list(range(9))), st.integers(min_value=0, max_value=9))
late_games = st.tuples(st.permutations(list(range(9))), st.integers(min_value=3, max_value=9))


@given(games)
def test_turn_alternates_starting_with_x(game):
    history = _play(*game)
    expected = Mark.X
    for b in history:
        assert current_player(b) is expected
        expected = expected.opponent()


@given(games)
def test_legal_moves_plus_occupied_is_nine(game):
    for b in _play(*game):
        moves = legal_moves(b)
        assert len(moves) + b.occupied_count() == 9
        assert moves == sorted(moves)


@given(games)
def test_reached_boards_are_valid_states(game):
    for b in _play(*game):
        assert is_valid_state(b)
        assert b.count(Mark.X) - b.count(Mark.O) in (0, 1)


@given(games)
def test_reapplying_a_move_fails(game):
    b = _play(*game)[-1]
    for mv in legal_moves(b):
        child = apply_move(b, mv)
        with pytest.raises(InvalidMoveError):
            apply_move(child, mv)
        res = try_apply_move(child, mv)
        assert not res.ok and res.board == child


@given(st.integers(min_value=-5, max_value=8), st.integers(min_value=-5, max_value=8))
def test_out_of_range_rejected(row: int, col: int):
    b = initial_board()
    if 0 <= row <= 2 and 0 <= col <= 2:
        assert apply_move(b, (row, col))[row, col] is Mark.X
    else:
        with pytest.raises(InvalidMoveError):
            apply_move(b, (row, col))
        assert b == initial_board()


@settings(max_examples=40, deadline=None)
@given(late_games)
def test_best_move_is_legal_and_keeps_value(game):
    b = _play(*game)[-1]
    mv = best_move(b)
    if is_terminal(b):
        assert mv is None
        return
    assert mv in legal_moves(b)
    # optimal move preserves the game-theoretic value
    assert evaluate(apply_move(b, mv)) == evaluate(b)


@settings(max_examples=40, deadline=None)
@given(late_games, st.sampled_from(ALL_SYMS))
def test_value_is_invariant_under_symmetry(game, kind):
    b = _play(*game)[-1]
    assert evaluate(transform_board(b, kind)) == evaluate(b)
