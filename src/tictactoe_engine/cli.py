from __future__ import annotations

import argparse
import logging
from collections import Counter
from typing import Optional

from . import config
from .analysis import play_out, self_play
from .board import (
    Board,
    Mark,
    Outcome,
    current_player,
    is_terminal,
    is_valid_state,
    outcome,
    parse_board,
    serialize_board,
    winning_line,
)
from .search import SearchStats, best_move, evaluate, search


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-engine", description="Tic-tac-toe engine CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None, help="Seed for random opponents (default: TTT_ENGINE_SEED)")

    p_move = sub.add_parser("move", help="Best move for the side to move (9 chars, 0=empty,1=X,2=O)")
    p_move.add_argument("--board", help="Board string, e.g., 110220000 (omit with --stdin)")
    p_move.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_out = sub.add_parser("outcome", help="Outcome and winning line of a board")
    p_out.add_argument("--board", required=True, help="Board string, e.g., 111220000")

    p_self = sub.add_parser("selfplay", help="Engine plays both sides from a board")
    p_self.add_argument("--board", default="0" * 9, help="Starting board (default: empty)")

    p_play = sub.add_parser("playout", help="Engine against a uniformly random opponent")
    p_play.add_argument(
        "--engine",
        choices=["X", "O"],
        default=None,
        help="Side the engine plays (default: TTT_ENGINE_SEAT or O)",
    )
    p_play.add_argument("--games", type=int, default=100, help="Number of games (default: 100)")

    return p


def _read_board(raw: Optional[str]) -> Optional[Board]:
    try:
        b = parse_board(raw or "")
    except ValueError as e:
        logging.error("Invalid board string: %s", e)
        return None
    if not is_valid_state(b):
        logging.error("Board is not a valid reachable state.")
        return None
    return b


def _cmd_move(ns: argparse.Namespace) -> int:
    if ns.stdin:
        import csv as _csv
        import sys as _sys

        w = _csv.writer(_sys.stdout)
        w.writerow(["board", "to_move", "best_row", "best_col", "value"])
        for line in _sys.stdin:
            raw = line.rstrip("\r\n")
            if not raw:
                continue
            try:
                b = parse_board(raw)
            except ValueError:
                continue
            if not is_valid_state(b):
                continue
            mv = best_move(b)
            w.writerow([
                serialize_board(b),
                current_player(b).value,
                "" if mv is None else mv.row,
                "" if mv is None else mv.col,
                evaluate(b),
            ])
        return 0

    b = _read_board(ns.board)
    if b is None:
        return 2
    if is_terminal(b):
        logging.info("best=None outcome=%s", outcome(b).value)
        return 0
    stats = SearchStats()
    res = search(b, stats)
    logging.info(
        "to_move=%s best=%s value=%d nodes=%d",
        current_player(b).value,
        tuple(res.move),
        res.value,
        stats.nodes,
    )
    return 0


def _cmd_outcome(ns: argparse.Namespace) -> int:
    b = _read_board(ns.board)
    if b is None:
        return 2
    line = winning_line(b)
    logging.info(
        "outcome=%s winning_line=%s",
        outcome(b).value,
        None if line is None else [tuple(pos) for pos in line.cells],
    )
    return 0


def _cmd_selfplay(ns: argparse.Namespace) -> int:
    b = _read_board(ns.board)
    if b is None:
        return 2
    history = self_play(b)
    for ply, board in enumerate(history[1:], start=1):
        logging.info("ply=%d board=%s", ply, serialize_board(board))
        logging.debug("\n%s", board)
    logging.info("outcome=%s", outcome(history[-1]).value)
    return 0


def _cmd_playout(ns: argparse.Namespace) -> int:
    if ns.games < 1:
        logging.error("--games must be positive: %s", ns.games)
        return 2
    engine = Mark(ns.engine) if ns.engine else config.engine_seat()
    seed = ns.seed if ns.seed is not None else config.default_seed()
    # game g draws from seed + g
    counts: Counter = Counter()
    for g in range(ns.games):
        game_seed = None if seed is None else seed + g
        counts[outcome(play_out(engine, seed=game_seed)[-1])] += 1
    logging.info(
        "engine=%s games=%d x_wins=%d o_wins=%d draws=%d",
        engine.value,
        ns.games,
        counts[Outcome.X_WINS],
        counts[Outcome.O_WINS],
        counts[Outcome.DRAW],
    )
    lost = counts[Outcome.O_WINS] if engine is Mark.X else counts[Outcome.X_WINS]
    if lost:
        logging.error("Engine lost %d game(s)", lost)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else config.log_level(),
                        format="[%(levelname)s] %(message)s")

    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictactoe-engine"))
        except Exception:
            print("unknown")
        return 0

    try:
        if ns.cmd == "move":
            return _cmd_move(ns)
        if ns.cmd == "outcome":
            return _cmd_outcome(ns)
        if ns.cmd == "selfplay":
            return _cmd_selfplay(ns)
        if ns.cmd == "playout":
            return _cmd_playout(ns)
    except ValueError as e:
        logging.error("%s", e)
        return 2

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
