"""Loader for puzzle files."""

from collections import Counter
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import numpy as np

from tilemax.board import BOARD_SIZE, Board
from tilemax.tiles import LetterPool, create_letter_pool, letter_pool_from_counts

LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


@dataclass
class PuzzleConfig:
    """A puzzle: the letters to play, the words allowed and the starting board."""

    name: str
    """Puzzle name, used to name the log file."""

    tiles: Counter[str]
    """A multiset of available letters."""

    words: set[str] | None = None
    """Words allowed in this puzzle.  If None, the configured word list file is used."""

    board_str: str | None = None
    """The initial board in row-major order, '.' for empty cells.  None for an empty board.

    Letters on the initial board are fixtures: they do not come from `tiles` and score nothing.
    """

    size: int = BOARD_SIZE
    """Width and height of the board."""

    def __post_init__(self) -> None:
        """Validate the puzzle."""
        bad_tiles = {ch for ch in self.tiles if ch not in LETTERS}
        if bad_tiles:
            raise ValueError(f"Tiles contain invalid characters: {sorted(bad_tiles)}")
        if any(count < 0 for count in self.tiles.values()):
            raise ValueError("Tile counts must be non-negative.")

        if self.board_str is None:
            return

        if len(self.board_str) != self.size * self.size:
            raise ValueError(
                f"Board string length {len(self.board_str)} does not match a "
                f"{self.size}x{self.size} board."
            )
        bad_chars = set(self.board_str) - set(LETTERS + ".")
        if bad_chars:
            raise ValueError(f"Board contains invalid characters: {sorted(bad_chars)}")
        if not self.is_connected():
            raise ValueError("Letters on the initial board are not connected.")

    def __str__(self) -> str:
        words = "(word list file)" if self.words is None else f"{len(self.words)} words"
        return f"{self.name} ({self.size}x{self.size}): {''.join(sorted(self.tiles.elements()))}, {words}"

    def is_connected(self) -> bool:
        """Check that the letters on the initial board form a single orthogonal group."""
        if self.board_str is None:
            return True
        dims = (self.size, self.size)
        board = np.array(list(self.board_str)).reshape(dims)
        filled = board != "."
        visited = np.zeros(dims, dtype=bool)

        starts = np.argwhere(filled)
        if len(starts) == 0:
            return True  # Empty board

        # Depth-First Search (DFS) from the first letter
        stack = [tuple(starts[0])]
        while stack:
            r, c = stack.pop()
            if visited[r, c]:
                continue
            visited[r, c] = True
            for delta_r, delta_c in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
                r_new, c_new = r + delta_r, c + delta_c
                if 0 <= r_new < self.size and 0 <= c_new < self.size:
                    if filled[r_new, c_new] and not visited[r_new, c_new]:
                        stack.append((r_new, c_new))

        return bool(np.array_equal(visited, filled))

    def letter_pool(self) -> LetterPool:
        return create_letter_pool("".join(sorted(self.tiles.elements())))

    def initial_board(self) -> Board:
        """Build the starting board, holding every tile in its pool."""
        return Board(self.letter_pool(), self.board_str, self.size)


def clean(board_str: str) -> str:
    """Clean the board string by removing whitespace and converting all letters to uppercase."""
    return "".join(board_str.split()).upper()


def parse_tiles(line: str) -> Counter[str]:
    """Parse a tile line: either a string of letters, or 26 counts for A-Z."""
    fields = line.split()
    if len(fields) == 26 and all(f.isdigit() for f in fields):
        pool = letter_pool_from_counts(int(f) for f in fields)
        return Counter({LETTERS[i]: count for i, count in enumerate(pool) if count})
    return Counter(clean(line))


def load_config(config_path: str | PathLike, *, size: int = BOARD_SIZE) -> PuzzleConfig:
    """Load a puzzle file.

    Format::

        <tiles: letters, e.g. CAAS, or 26 counts for A-Z>
        <allowed words separated by spaces, or an empty line to use the word list file>
        <blank line>
        <optional initial board: `size` rows of `size` cells, '.' for empty>

    Args:
        config_path: Path to the puzzle file.
        size: Width and height of the board.
    """
    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Puzzle file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        tile_line = f.readline().strip()
        if not tile_line:
            raise ValueError(f"Missing tile line in {path}")
        tiles = parse_tiles(tile_line)

        words_line = f.readline().strip()
        words = set(words_line.upper().split()) if words_line else None

        separator = f.readline()
        if separator and separator.strip():
            raise ValueError(f"Expected a blank line after the word line in {path}")

        board_lines = [line.strip() for line in f if line.strip()]

    board_str = clean("".join(board_lines)) if board_lines else None
    return PuzzleConfig(name=path.stem, tiles=tiles, words=words, board_str=board_str, size=size)
