"""Board representation: tile grid, letter pool and running score."""

import re
import sys
from array import array
from itertools import count
from typing import TextIO

from tilemax.move import Direction, Move, MoveRecord
from tilemax.tiles import LETTER_POINTS, LetterPool, letter_pool_to_string

BOARD_SIZE = 15
"""Default board width and height."""

EMPTY = ord(".")

VALID_LAYOUT = re.compile(r"[A-Z.]*")

_board_ids = count()


class MoveError(ValueError):
    """Base class for errors raised when a move cannot be prepared, applied or undone."""


class InvalidPlacementError(MoveError):
    """The move does not fit on the board as it stands."""


class UnpreparedMoveError(MoveError):
    """The move was not prepared against the current state of this board."""


class InsufficientLettersError(MoveError):
    """The letter pool cannot cover the letters the move would place."""


class MoveOrderError(MoveError):
    """The move being undone is not the last move applied to this board."""


class Board:
    """Store an N x N grid of letters as a 1D bytearray, with a letter pool and a score.

    Cells are listed row-wise.  '.' represents an empty cell, 'A'-'Z' a placed letter.
    Coordinates are (x, y) = (column, row).

    Moves are applied and undone in strict LIFO order.  Every applied move sits on a stack;
    undoing anything other than the top of the stack is refused.
    """

    def __init__(self, pool: LetterPool, layout: str | None = None, size: int = BOARD_SIZE):
        if layout is None:
            layout = "." * (size * size)
        if len(layout) != size * size:
            raise ValueError(f"Layout length {len(layout)} does not match a {size}x{size} board.")
        if not VALID_LAYOUT.fullmatch(layout):
            raise ValueError("Layout may only contain letters A-Z and '.' for empty cells.")

        self.size: int = size
        """Width and height of the board."""

        self.layout: bytearray = bytearray(layout, "ascii")
        """Row-major cell contents."""

        self.pool: LetterPool = array("B", pool)
        """Remaining count of each letter A-Z."""

        self.score: int = 0
        """Sum of the score deltas of all applied moves."""

        self._applied: list[Move] = []
        self._generation: int = 0
        self._id: int = next(_board_ids)

    def _idx(self, x: int, y: int) -> int:
        return y * self.size + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def letter_at(self, x: int, y: int) -> str | None:
        """Letter at (x, y), or None if the cell is empty or off the board."""
        if not self.in_bounds(x, y):
            return None
        ch = self.layout[self._idx(x, y)]
        return None if ch == EMPTY else chr(ch)

    def is_occupied(self, x: int, y: int) -> bool:
        """True if the cell holds a letter.  Cells off the board count as occupied."""
        if not self.in_bounds(x, y):
            return True
        return self.layout[self._idx(x, y)] != EMPTY

    def is_surrounded(self, x: int, y: int) -> bool:
        """True if there is a letter or border on a horizontal side and on a vertical side."""
        return (self.is_occupied(x - 1, y) or self.is_occupied(x + 1, y)) and (
            self.is_occupied(x, y - 1) or self.is_occupied(x, y + 1)
        )

    def has_adjacent_letters(self, x: int, y: int) -> bool:
        """True if any on-board orthogonal neighbour of (x, y) holds a letter."""
        return any(
            self.letter_at(nx, ny) is not None
            for nx, ny in ((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1))
        )

    def is_empty(self) -> bool:
        """True if no letters are on the board."""
        return self.layout.count(EMPTY) == len(self.layout)

    def has_remaining_letters(self) -> bool:
        return any(self.pool)

    def span(self, x: int, y: int, direction: Direction, length: int) -> str:
        """Contents of `length` cells starting at (x, y), with '.' for empty cells.

        Raises:
            IndexError: If the span leaves the board.
        """
        dx, dy = direction.step
        end_x, end_y = x + (length - 1) * dx, y + (length - 1) * dy
        if not (self.in_bounds(x, y) and self.in_bounds(end_x, end_y)):
            raise IndexError(f"Span of {length} from ({x},{y}) {direction.name} leaves the board.")
        step = 1 if direction is Direction.ACROSS else self.size
        start = self._idx(x, y)
        return self.layout[start : start + length * step : step].decode("ascii")

    def prepare(self, move: Move) -> None:
        """Compute and store the data needed to apply and later undo `move`.

        Must be called against the board state immediately preceding `apply(move)`.

        Raises:
            InvalidPlacementError: If the word leaves the board, contains a non-letter,
                or disagrees with a letter already on the board.
        """
        word = move.word
        if not word:
            raise InvalidPlacementError("Cannot place an empty word.")
        end_x, end_y = move.end
        if not (self.in_bounds(move.x, move.y) and self.in_bounds(end_x, end_y)):
            raise InvalidPlacementError(f"Move {move} does not fit on the board.")

        previous = self.span(move.x, move.y, move.direction, len(word))
        added: list[str] = []
        score = 0
        for i, (ch, board_ch) in enumerate(zip(word, previous)):
            if not "A" <= ch <= "Z":
                raise InvalidPlacementError(f"Invalid letter {ch!r} in move {move}.")
            if board_ch == ".":
                added.append(ch)
                score += LETTER_POINTS[ord(ch) - ord("A")]
            elif board_ch != ch:
                raise InvalidPlacementError(
                    f"Conflict placing {move}: board has '{board_ch}' but word has '{ch}' at "
                    f"position {i}."
                )

        object.__setattr__(
            move,
            "record",
            MoveRecord(
                previous=previous,
                added_letters="".join(added),
                score=score,
                board_id=self._id,
                generation=self._generation,
            ),
        )

    def apply(self, move: Move) -> None:
        """Place a prepared move: write its letters, add its score, take letters from the pool.

        Raises:
            UnpreparedMoveError: If `move` was not prepared against this exact board state.
            InsufficientLettersError: If the pool cannot cover the newly placed letters.
        """
        record = move.record
        if record is None or record.board_id != self._id or record.generation != self._generation:
            raise UnpreparedMoveError(f"Move {move} was not prepared against this board state.")

        needed = [0] * 26
        for ch in record.added_letters:
            needed[ord(ch) - ord("A")] += 1
        for tile_idx, count in enumerate(needed):
            if count and self.pool[tile_idx] < count:
                raise InsufficientLettersError(
                    f"Not enough '{chr(ord('A') + tile_idx)}' tiles to play {move}."
                )

        self._write(move, move.word)
        for tile_idx, count in enumerate(needed):
            self.pool[tile_idx] -= count
        self.score += record.score
        self._applied.append(move)
        self._generation += 1

    def undo(self, move: Move) -> None:
        """Restore the board to its state before the matching `apply(move)`.

        Raises:
            MoveOrderError: If `move` is not the most recently applied move.
        """
        if not self._applied or self._applied[-1] is not move:
            raise MoveOrderError(f"Move {move} is not the last move applied to this board.")
        record = move.record
        # Only prepared moves reach the stack.
        assert record is not None

        self._applied.pop()
        self._write(move, record.previous)
        for ch in record.added_letters:
            self.pool[ord(ch) - ord("A")] += 1
        self.score -= record.score
        self._generation += 1

    def _write(self, move: Move, letters: str) -> None:
        step = 1 if move.direction is Direction.ACROSS else self.size
        idx = self._idx(move.x, move.y)
        for ch in letters:
            self.layout[idx] = ord(ch)
            idx += step

    def checkpoint(self) -> int:
        """Marker for the current depth of the applied-move stack."""
        return len(self._applied)

    def rollback(self, mark: int) -> None:
        """Undo applied moves until the stack is back to `mark`."""
        while len(self._applied) > mark:
            self.undo(self._applied[-1])

    @property
    def applied_moves(self) -> tuple[Move, ...]:
        return tuple(self._applied)

    def copy(self) -> "Board":
        """Independent copy of the grid, pool and score.  The move stack is not copied."""
        board = Board(self.pool, self.layout.decode("ascii"), self.size)
        board.score = self.score
        return board

    def __str__(self) -> str:
        """Row-major grid contents, one character per cell.  Used for equality and hashing."""
        return self.layout.decode("ascii")

    def __repr__(self) -> str:
        return f"Board(size={self.size}, score={self.score}, pool={letter_pool_to_string(self.pool)!r})"

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Board):
            return NotImplemented
        return self.layout == other.layout

    def __hash__(self) -> int:
        return hash(bytes(self.layout))

    def to_pretty_string(self) -> str:
        """Grid rendering with cell separators, for reports and traces."""
        border = "-" * (2 * self.size + 1)
        lines = [border]
        for row in range(self.size):
            cells = self.layout[row * self.size : (row + 1) * self.size].decode("ascii")
            lines.append("|" + "|".join(" " if ch == "." else ch for ch in cells) + "|")
        lines.append(border)
        return "\n".join(lines)

    def print(self, file: TextIO | None = None) -> None:
        """Print the board layout."""
        print(self.to_pretty_string(), file=file or sys.stdout)
