"""
Terminal host loop rendered with rich.

The loop shows a welcome screen, asks for the game mode once per session,
then plays matches: it redraws the grid every turn, reads cell numbers 1-9
from the human (re-prompting on anything invalid), lets the computer move on
its turns, announces the verdict, records it in the session score and asks
whether to play again.

Input goes through a ``read_line(prompt) -> str`` callable so the whole loop
can be driven from a script in tests.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, TypeVar

import numpy as np
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .board import EMPTY, Board, InvalidMove, Mark
from .controller import Ended, GameMode, TurnController, new_match
from .rules import Verdict, Win, describe
from .session import Score, SessionTracker
from .strategy import Difficulty

ReadLine = Callable[[str], str]
T = TypeVar("T")

MARK_STYLES = {Mark.X: "bold red", Mark.O: "bold cyan"}
YES_NO = {"y": True, "yes": True, "n": False, "no": False}


def render_board(board: Board, verdict: Optional[Verdict] = None) -> Text:
    """Grid with 1-9 keys in empty cells; a winning line is shown reversed."""
    winning = set(verdict.line) if isinstance(verdict, Win) else set()
    text = Text()
    for row in range(3):
        for col in range(3):
            i = row * 3 + col
            v = board.cell_at(i)
            text.append(" ")
            if v == EMPTY:
                text.append(str(i + 1), style="dim")
            else:
                style = MARK_STYLES[Mark(v)]
                if i in winning:
                    style += " reverse"
                text.append(Mark(v).symbol, style=style)
            text.append(" ")
            if col < 2:
                text.append("|")
        text.append("\n")
        if row < 2:
            text.append("---+---+---\n")
    return text


def parse_cell(raw: str) -> Optional[int]:
    raw = raw.strip()
    if len(raw) == 1 and raw in "123456789":
        return int(raw) - 1
    return None


class TerminalGame:
    def __init__(
        self,
        console: Optional[Console] = None,
        read_line: Optional[ReadLine] = None,
        mode: Optional[GameMode] = None,
        rng: Optional[np.random.Generator] = None,
        tracker: Optional[SessionTracker] = None,
    ):
        self.console = console if console is not None else Console()
        self.read_line: ReadLine = read_line if read_line is not None else self.console.input
        self.mode = mode
        self.rng = rng if rng is not None else np.random.default_rng()
        self.tracker = tracker if tracker is not None else SessionTracker()
        self.last_move: Optional[str] = None

    def run(self) -> Score:
        self.show_welcome()
        if self.mode is None:
            self.mode = self.ask_mode()
        while True:
            verdict = self.play_match(self.mode)
            self.tracker.record_result(verdict)
            logging.debug("score=%s", self.tracker.snapshot())
            self.show_score()
            if not self.ask_replay():
                break
        return self.tracker.score

    def play_match(self, mode: GameMode) -> Verdict:
        board, controller = new_match(mode, self.rng)
        self.last_move = None
        while True:
            self.draw(board)
            if controller.is_computer_turn():
                mark = controller.active_mark
                index, outcome = controller.computer_move()
                # shown by the next draw, which clears the screen first
                self.last_move = f"Computer ({mark.symbol}) plays {index + 1}"
            else:
                outcome = self.ask_human_move(controller)
                self.last_move = None
            if isinstance(outcome, Ended):
                self.draw(board, outcome.verdict)
                self.console.print(Text(describe(outcome.verdict), style="bold green"))
                return outcome.verdict

    def ask_human_move(self, controller: TurnController):
        mark = controller.active_mark
        prompt = f"Player {mark.symbol}, enter position (1-9): "
        while True:
            index = parse_cell(self.read_line(prompt))
            if index is not None:
                try:
                    return controller.submit_move(index)
                except InvalidMove as exc:
                    logging.debug("rejected: %s", exc)
            prompt = "Invalid input or cell occupied. Try again: "

    def ask_mode(self) -> GameMode:
        against = self._choose(
            "Play against (1) another player or (2) the computer? ",
            {"1": False, "2": True},
        )
        if not against:
            return GameMode.two_human()
        difficulty = self._choose(
            "Difficulty: (e)asy or (h)ard? ",
            {"e": Difficulty.EASY, "easy": Difficulty.EASY, "h": Difficulty.HARD, "hard": Difficulty.HARD},
        )
        first = self._choose("Do you want to go first? (y/n): ", YES_NO)
        return GameMode.vs_computer(difficulty, human_goes_first=first)

    def ask_replay(self) -> bool:
        return self._choose("Play again? (y/n): ", YES_NO, retry="Invalid input. Type y or n: ")

    def _choose(self, prompt: str, options: Dict[str, T], retry: Optional[str] = None) -> T:
        if retry is None:
            retry = f"Invalid input. {prompt}"
        while True:
            raw = self.read_line(prompt).strip().lower()
            if raw in options:
                return options[raw]
            prompt = retry

    def show_welcome(self) -> None:
        self.console.clear()
        body = Text.assemble(
            ("X moves first, then O.\n", ""),
            ("Select cells by typing numbers 1-9:\n\n", ""),
            (" 1 | 2 | 3\n 4 | 5 | 6\n 7 | 8 | 9", "dim"),
        )
        self.console.print(Panel(body, title="Welcome to Tic Tac Toe", expand=False))
        self.read_line("Press Enter to start...")

    def draw(self, board: Board, verdict: Optional[Verdict] = None) -> None:
        self.console.clear()
        self.console.print(Text("Tic Tac Toe", style="bold"))
        self.console.print()
        self.console.print(render_board(board, verdict))
        if self.last_move:
            self.console.print(self.last_move)

    def show_score(self) -> None:
        score = self.tracker.score
        table = Table(title="Score")
        table.add_column("X wins", justify="right")
        table.add_column("O wins", justify="right")
        table.add_column("Draws", justify="right")
        table.add_row(str(score.x_wins), str(score.o_wins), str(score.draws))
        self.console.print(table)
