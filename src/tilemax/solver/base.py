"""Abstract solver: runs a search strategy over a board and tracks the best board found."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from time import time
from typing import TextIO

from tilemax.board import Board
from tilemax.wordlist import WordList


@dataclass
class SolverStats:
    """Statistics collected during solving."""

    boards_checked: int = 0
    """Number of board states examined."""

    best_updates: int = 0
    """Number of times a strictly better board was found."""

    max_depth_reached: int = 0
    """Maximum number of moves applied at once."""

    start_time: float = field(default_factory=time)
    """Timestamp when solving started."""


class Solver(ABC):
    """Finds the board state that maximizes the score, starting from `board`.

    Concrete strategies implement `explore()`, which may mutate the board it is given as long as
    it calls `record()` on every board worth keeping.  The authoritative result is `self.best`,
    an independent copy.
    """

    def __init__(self, board: Board, dictionary: WordList, *, logf: TextIO | None = None):
        """Create a solver.

        Args:
            board: The starting board.  Mutated during the search and restored afterwards.
            dictionary: Word list used to decide which words may be played.
            logf: Optional stream for trace messages.  No tracing if None.
        """
        self.board = board
        self.dictionary = dictionary
        self.logf = logf
        self.best: Board = board.copy()
        self.stats = SolverStats()

    def solve(self) -> Board:
        """Run the search on the held board and return the best board found."""
        self.print("Initial board:\n" + self.board.to_pretty_string())
        self.best = self.board.copy()
        self.stats = SolverStats()

        mark = self.board.checkpoint()
        try:
            self.explore(self.board)
        finally:
            self.board.rollback(mark)

        self.print(f"Optimal solution ({self.best.score} points):\n" + self.best.to_pretty_string())
        return self.best

    @abstractmethod
    def explore(self, board: Board) -> None:
        """Search from `board`, calling `record()` for candidate best boards."""

    def record(self, board: Board) -> bool:
        """Keep a copy of `board` if it beats the best score so far.  Returns True if kept."""
        if board.score <= self.best.score:
            return False
        self.best = board.copy()
        self.stats.best_updates += 1
        self.print(f"New best: {board.score} points")
        return True

    def print(self, message: str) -> None:
        """Write `message` to the trace stream, if enabled."""
        if self.logf is not None:
            print(message, file=self.logf, flush=True)
