"""Main solver module: runs a puzzle end to end and reports the result."""

import sys
from datetime import datetime
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from tilemax.board import Board
from tilemax.puzzle_config import PuzzleConfig
from tilemax.solver.backtracking import BacktrackingSolver
from tilemax.solver.config import config as solver_config
from tilemax.solver.utils import TIMESTAMP_FMT, int_comma, time_str
from tilemax.tiles import letter_pool_to_string
from tilemax.wordlist import WordList, load_word_list


def run(config: PuzzleConfig) -> Board:
    """Run the solver on the given puzzle, logging to `<log_dir>/<name>.log`.

    Args:
        config (PuzzleConfig): The puzzle to solve.
    """
    print(f"config: {config}")

    logfile = Path(solver_config.log_dir) / f"{config.name}.log"
    print(f"Log file: {logfile}")
    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            best = solve_one(config, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)
    print()
    return best


def solve_one(puzzle_config: PuzzleConfig, *, logf: TextIO) -> Board:
    """Find the highest-scoring board for a puzzle.

    Args:
        puzzle_config (PuzzleConfig): The puzzle to solve.
        logf: File object to log the solving process.

    Returns:
        The best board found.
    """
    print(f"Selected puzzle: {puzzle_config.name}", file=logf, flush=True)
    print("Solver config:", file=logf, flush=True)
    pprint(solver_config.model_dump(), stream=logf, width=120)

    if puzzle_config.words is not None:
        dictionary = WordList(puzzle_config.words)
        source = "puzzle file"
    else:
        dictionary = WordList(
            load_word_list(solver_config.word_list_path, max_len=puzzle_config.size)
        )
        source = solver_config.word_list_path
    print(f"Dictionary: {int_comma(len(dictionary))} words from {source}", file=logf, flush=True)

    board = puzzle_config.initial_board()
    print(f"Letter pool: {letter_pool_to_string(board.pool)}", file=logf, flush=True)

    start_time = time()
    start_time_str = datetime.fromtimestamp(start_time).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)
    print("", file=logf, flush=True)

    solver = BacktrackingSolver(
        board,
        dictionary,
        logf=logf if solver_config.trace else None,
    )
    best = solver.solve()
    elapsed = time_str(time() - start_time)

    for out in (logf, sys.stdout):
        print("Best board:", file=out)
        best.print(file=out)
        print(f"Score: {best.score}", file=out)
        print(f"Remaining letters: {letter_pool_to_string(best.pool) or '-'}", file=out)
        print(f"Boards checked: {int_comma(solver.stats.boards_checked)}", file=out)
        print(f"Time taken: {elapsed}", file=out, flush=True)

    return best
