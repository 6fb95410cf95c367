"""Exhaustive depth-first search over legal move sequences."""

from time import time
from typing import TextIO

from tilemax.board import Board
from tilemax.rules import LegalityFilter
from tilemax.solver.base import Solver
from tilemax.solver.config import config as solver_config
from tilemax.solver.utils import int_comma, time_str
from tilemax.tiles import letter_pool_points, letter_pool_to_string
from tilemax.wordlist import WordList


class BacktrackingSolver(Solver):
    """Visit every sequence of legal moves on a single shared board.

    Each move is prepared, applied, explored and undone before the next one is tried, so the
    board is back to its entry state whenever `explore()` returns.
    """

    def __init__(
        self,
        board: Board,
        dictionary: WordList,
        *,
        rules: LegalityFilter | None = None,
        logf: TextIO | None = None,
        use_score_bound: bool | None = None,
        report_interval: int | None = None,
    ):
        super().__init__(board, dictionary, logf=logf)
        self.rules = rules if rules is not None else LegalityFilter(dictionary)
        self.use_score_bound = (
            solver_config.use_score_bound if use_score_bound is None else use_score_bound
        )
        self.report_interval = (
            solver_config.report_interval if report_interval is None else report_interval
        )

    def explore(self, board: Board, depth: int = 0) -> None:
        self.stats.boards_checked += 1
        self.stats.max_depth_reached = max(self.stats.max_depth_reached, depth)
        if self.report_interval and self.stats.boards_checked % self.report_interval == 0:
            self.report_progress(board, depth)

        if not board.has_remaining_letters():
            self.record(board)
            return

        # Even placing every remaining letter cannot beat the best board.
        if self.use_score_bound and board.score + letter_pool_points(board.pool) <= self.best.score:
            return

        moves = self.rules.legal_moves(board)
        if not moves:
            self.record(board)
            return

        for move in moves:
            board.prepare(move)
            board.apply(move)
            try:
                self.explore(board, depth + 1)
            finally:
                board.undo(move)

    def report_progress(self, board: Board, depth: int) -> None:
        """Print a one-line progress summary to stdout."""
        elapsed = time() - self.stats.start_time
        print(
            f"Checked {int_comma(self.stats.boards_checked)} boards after {time_str(elapsed)}; "
            f"depth {depth} (max {self.stats.max_depth_reached}); "
            f"best score {self.best.score}; "
            f"remaining letters {letter_pool_to_string(board.pool) or '-'}.",
            flush=True,
        )
