"""Word placements ("moves") on the board."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import NamedTuple


class Direction(IntEnum):
    """Enumeration for word directions."""

    ACROSS = 0
    DOWN = 1

    @property
    def step(self) -> tuple[int, int]:
        """The (dx, dy) offset between consecutive letters of a word."""
        return (1, 0) if self is Direction.ACROSS else (0, 1)

    @property
    def cross(self) -> "Direction":
        """The perpendicular direction."""
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS


class MoveRecord(NamedTuple):
    """Derived data computed by `Board.prepare` and consumed by `Board.apply`/`Board.undo`."""

    previous: str
    """Cell contents along the span before the move ('.' for empty)."""

    added_letters: str
    """Letters of the word that land on empty cells, in span order."""

    score: int
    """Points contributed by `added_letters`."""

    board_id: int
    """Serial number of the board the move was prepared against."""

    generation: int
    """Generation of that board when the move was prepared.

    The board bumps its generation on every apply and undo, so a record is only good for
    the exact state it was computed from.
    """


@dataclass(frozen=True)
class Move:
    """A proposed word placement.

    Identity covers `(word, x, y, direction)` only; the derived `record` is ignored by
    equality and hashing so the same proposal can be used as a dedup key regardless of
    whether it has been prepared.  Moves are frozen: only `Board.prepare` attaches a record.
    """

    word: str
    x: int
    """Column of the first letter."""
    y: int
    """Row of the first letter."""
    direction: Direction

    record: MoveRecord | None = field(default=None, compare=False, hash=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "word", self.word.upper())
        object.__setattr__(self, "direction", Direction(self.direction))

    def __str__(self) -> str:
        return f'"{self.word}" @ ({self.x},{self.y}) going {self.direction.name}'

    @property
    def end(self) -> tuple[int, int]:
        """Coordinates of the last letter."""
        dx, dy = self.direction.step
        n = len(self.word) - 1
        return self.x + n * dx, self.y + n * dy

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) coordinates covered by the word, in order."""
        dx, dy = self.direction.step
        for i in range(len(self.word)):
            yield self.x + i * dx, self.y + i * dy

    @property
    def sort_key(self) -> tuple[str, int, int, int]:
        """Deterministic ordering key: word, then direction, then row, then column."""
        return (self.word, int(self.direction), self.y, self.x)

    @property
    def prepared(self) -> bool:
        return self.record is not None
