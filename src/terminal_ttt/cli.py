from __future__ import annotations

import argparse
import logging
from typing import Optional

import numpy as np

from .board import Board, Mark
from .controller import GameMode
from .rules import Win, evaluate, is_terminal
from .settings import default_difficulty, default_seed
from .simulation import run_series
from .strategy import Difficulty, choose_move
from .tactics import completing_moves, fork_moves
from .terminal import TerminalGame

DIFFICULTY_CHOICES = [d.value for d in Difficulty]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Terminal tic-tac-toe")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument(
        "--seed",
        type=int,
        default=default_seed(),
        help="Seed for the computer opponent (default: $TTT_SEED, else random)",
    )

    p_play = sub.add_parser("play", help="Play in the terminal")
    p_play.add_argument(
        "--mode",
        choices=["two-player", "computer"],
        default=None,
        help="Game mode (asked interactively when omitted)",
    )
    p_play.add_argument(
        "--difficulty",
        choices=DIFFICULTY_CHOICES,
        default=None,
        help="Computer difficulty; implies --mode computer (default: $TTT_DIFFICULTY, else hard)",
    )
    p_play.add_argument(
        "--computer-first", action="store_true", help="Let the computer play X and move first; implies --mode computer"
    )

    p_eval = sub.add_parser("evaluate", help="Report the verdict for a board (9 digits, 0=empty,1=X,2=O)")
    p_eval.add_argument("--board", required=True, help="Board string, e.g., 121212000")

    p_sug = sub.add_parser("suggest", help="Ask a computer opponent for its move")
    p_sug.add_argument("--board", required=True, help="Board string, e.g., 110220000")
    p_sug.add_argument("--difficulty", choices=DIFFICULTY_CHOICES, default=Difficulty.HARD.value)
    p_sug.add_argument(
        "--mark", choices=["X", "O"], default=None, help="Mark to move (default: side-to-move)"
    )

    p_tac = sub.add_parser("tactics", help="List completing moves and forks for both marks")
    p_tac.add_argument("--board", required=True, help="Board string, e.g., 100020200")

    p_sim = sub.add_parser("simulate", help="Play computer against computer and report the score")
    p_sim.add_argument("--x", choices=DIFFICULTY_CHOICES, default=Difficulty.HARD.value, help="X difficulty")
    p_sim.add_argument("--o", choices=DIFFICULTY_CHOICES, default=Difficulty.EASY.value, help="O difficulty")
    p_sim.add_argument("--rounds", type=int, default=100, help="Number of matches")

    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy", "rich"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            from importlib.metadata import version as _ver

            print(f"{pkg}={_ver(pkg)}")


def _side_to_move(board: Board) -> Mark:
    cells = board.cells
    return Mark.X if cells.count(Mark.X) == cells.count(Mark.O) else Mark.O


def _load_board(raw: str) -> Optional[Board]:
    try:
        return Board.from_string(raw)
    except ValueError as exc:
        logging.error("%s", exc)
        return None


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("terminal-ttt"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "play":
        mode = None
        wants_computer = ns.difficulty is not None or ns.computer_first
        if ns.mode == "two-player":
            if wants_computer:
                logging.warning("--difficulty and --computer-first are ignored with --mode two-player")
            mode = GameMode.two_human()
        elif ns.mode == "computer" or wants_computer:
            difficulty = Difficulty(ns.difficulty) if ns.difficulty else default_difficulty()
            mode = GameMode.vs_computer(difficulty, human_goes_first=not ns.computer_first)
        game = TerminalGame(mode=mode, rng=np.random.default_rng(ns.seed))
        try:
            score = game.run()
        except (KeyboardInterrupt, EOFError):
            logging.info("Game interrupted. Goodbye!")
            return 0
        logging.info("x_wins=%d o_wins=%d draws=%d", score.x_wins, score.o_wins, score.draws)
        return 0

    if ns.cmd == "evaluate":
        board = _load_board(ns.board)
        if board is None:
            return 2
        verdict = evaluate(board)
        if isinstance(verdict, Win):
            logging.info("verdict=win mark=%s line=%s", verdict.mark.symbol, list(verdict.line))
        else:
            logging.info("verdict=%s", type(verdict).__name__.lower())
        return 0

    if ns.cmd == "suggest":
        board = _load_board(ns.board)
        if board is None:
            return 2
        if is_terminal(evaluate(board)):
            logging.error("Board is already finished.")
            return 2
        mark = Mark[ns.mark] if ns.mark else _side_to_move(board)
        move = choose_move(board, mark, Difficulty(ns.difficulty), np.random.default_rng(ns.seed))
        logging.info("mark=%s difficulty=%s move=%d", mark.symbol, ns.difficulty, move)
        return 0

    if ns.cmd == "tactics":
        board = _load_board(ns.board)
        if board is None:
            return 2
        for mark in Mark:
            logging.info(
                "mark=%s wins=%s forks=%s",
                mark.symbol,
                completing_moves(board, mark),
                fork_moves(board, mark),
            )
        return 0

    if ns.cmd == "simulate":
        if ns.rounds < 1:
            logging.error("Rounds must be at least 1: %s", ns.rounds)
            return 2
        score = run_series(Difficulty(ns.x), Difficulty(ns.o), ns.rounds, seed=ns.seed)
        logging.info(
            "x=%s o=%s rounds=%d x_wins=%d o_wins=%d draws=%d",
            ns.x,
            ns.o,
            ns.rounds,
            score.x_wins,
            score.o_wins,
            score.draws,
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
