"""Module for word list management: loading and the dictionary oracle."""

from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path

from bitarray import bitarray
from bitarray.util import ones, zeros
from sortedcontainers import SortedList, SortedSet


def load_word_list(
    path: str | PathLike, *, min_len: int = 2, max_len: int | None = None
) -> set[str]:
    """Load a word list file, one word per line.

    Args:
        path: Path to the word list file.
        min_len: Minimum word length to include.
        max_len: Optional maximum word length to include (e.g. the board size).

    Returns:
        A set of uppercase words.
    """
    word_list_path = Path(path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        words: set[str] = set()
        for line in f:
            word = line.strip().upper()
            if not word or not word.isascii() or not word.isalpha():
                continue
            if len(word) < min_len:
                continue
            if max_len is not None and len(word) > max_len:
                continue
            words.add(word)
        return words


WordBuckets = dict[int, list[list[bitarray]]]
"""Element [length][pos][ch] is a bit array over `words_by_length[length]`.

Bit i is set if word i of that length has character `ch` at position `pos`.
"""


class WordList:
    """Dictionary oracle: membership tests plus wildcard pattern lookup.

    Passed explicitly to whatever needs it, so several searches with different word lists can
    run in the same process.
    """

    def __init__(self, words: Iterable[str]):
        cleaned = SortedSet(w.strip().upper() for w in words)
        for word in cleaned:
            if not word.isascii() or not word.isalpha():
                raise ValueError(f"Invalid word in word list: {word!r}")
        self.words: SortedSet = cleaned
        """All words, sorted."""

        by_length: dict[int, list[str]] = {}
        for word in self.words:
            by_length.setdefault(len(word), []).append(word)
        self.words_by_length: dict[int, SortedList] = {
            length: SortedList(bucket) for length, bucket in by_length.items()
        }
        """Words bucketed by length.  Each bucket is sorted and never modified."""

        self._buckets: WordBuckets = self._create_word_buckets()

    def _create_word_buckets(self) -> WordBuckets:
        buckets: WordBuckets = {}
        for length, bucket in self.words_by_length.items():
            buckets[length] = [[zeros(len(bucket)) for _ in range(26)] for _ in range(length)]
            # Bit positions line up with the sorted bucket, which must not change afterwards.
            for word_index, word in enumerate(bucket):
                for pos, ch in enumerate(word):
                    buckets[length][pos][ord(ch) - ord("A")][word_index] = True
        return buckets

    @classmethod
    def from_file(
        cls, path: str | PathLike, *, min_len: int = 2, max_len: int | None = None
    ) -> "WordList":
        return cls(load_word_list(path, min_len=min_len, max_len=max_len))

    def contains(self, word: str) -> bool:
        """Return whether `word` is in the word list (case-insensitive)."""
        return word.upper() in self.words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    @property
    def lengths(self) -> list[int]:
        """Distinct word lengths, ascending."""
        return sorted(self.words_by_length)

    def match(self, pattern: str) -> list[str]:
        """Get all words matching the given pattern, in sorted order.

        Args:
            pattern: Letters A-Z, with '.' as a wildcard for any letter.
        """
        length = len(pattern)
        bucket = self.words_by_length.get(length)
        if not bucket:
            return []

        bits = ones(len(bucket))
        for pos, ch in enumerate(pattern):
            if ch == ".":
                continue
            ch_index = ord(ch) - ord("A")
            if not 0 <= ch_index < 26:
                raise ValueError(f"Invalid character '{ch}' in pattern.")
            bits &= self._buckets[length][pos][ch_index]
            if not bits.any():
                return []

        return [bucket[i] for i in bits.search(1)]
