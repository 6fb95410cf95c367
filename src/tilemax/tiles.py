"""Module for the letter pool and letter point values."""

from array import array
from collections.abc import Iterable

LETTER_POINTS: tuple[int, ...] = (
    1, 3, 3, 2, 1, 4, 2, 4, 1, 8, 5, 1, 3, 1, 1, 3, 10, 1, 1, 1, 1, 4, 4, 8, 4, 10,
)
"""Point value of each letter A-Z."""

MAX_LETTER_COUNT = 255

LetterPool = array
"""An array of 26 unsigned bytes holding the remaining count of each letter A-Z."""


def letter_index(ch: str) -> int:
    """Return the 0-based alphabet index of an uppercase letter.

    Raises:
        ValueError: If `ch` is not a single letter A-Z.
    """
    if len(ch) != 1 or not "A" <= ch <= "Z":
        raise ValueError(f"Invalid letter: {ch!r}")
    return ord(ch) - ord("A")


def create_letter_pool(tiles: str) -> LetterPool:
    """Create a letter pool from a string of tiles.

    Args:
        tiles: A string with one character per tile, case-insensitive.

    Returns:
        An array of 26 counts, one per letter A-Z.

    Raises:
        ValueError: If the string contains invalid characters or too many copies of a letter.
    """
    pool = array("B", [0] * 26)

    for ch in tiles.upper():
        index = letter_index(ch)
        if pool[index] == MAX_LETTER_COUNT:
            raise ValueError(f"Too many tiles of type '{ch}'; maximum is {MAX_LETTER_COUNT}.")
        pool[index] += 1
    return pool


def letter_pool_from_counts(counts: Iterable[int]) -> LetterPool:
    """Create a letter pool from 26 counts (A-Z)."""
    counts = list(counts)
    if len(counts) != 26:
        raise ValueError(f"Expected 26 letter counts, got {len(counts)}.")
    for i, count in enumerate(counts):
        if not 0 <= count <= MAX_LETTER_COUNT:
            raise ValueError(
                f"Count for '{chr(ord('A') + i)}' must be in [0, {MAX_LETTER_COUNT}], got {count}."
            )
    return array("B", counts)


def letter_pool_to_string(pool: LetterPool) -> str:
    """Spell out the letters held in the pool, in alphabetical order."""
    return "".join(chr(ord("A") + i) * count for i, count in enumerate(pool))


def letter_points(letters: str) -> int:
    """Total point value of the given letters."""
    return sum(LETTER_POINTS[letter_index(ch)] for ch in letters)


def letter_pool_points(pool: LetterPool) -> int:
    """Total point value of every letter still in the pool.

    This bounds the score that can still be added to a board holding `pool`.
    """
    return sum(count * points for count, points in zip(pool, LETTER_POINTS))
