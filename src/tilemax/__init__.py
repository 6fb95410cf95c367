"""Tilemax: highest-scoring word placement search.

Plays words from a finite pool of letters onto a 15x15 board so that every word formed is in a
given dictionary, and finds the sequence of placements with the highest total letter score.
Uses backtracking over a single shared board with exact apply/undo.
"""

from sys import argv, exit

from .puzzle_config import load_config
from .solver import solver


def main() -> None:
    """Main entry point for the Tilemax solver."""
    # Expect a single argument: path to the puzzle file
    if len(argv) != 2:
        print("Usage: python -m tilemax <path_to_puzzle_file>")
        exit(1)
    solver.run(load_config(argv[1]))
