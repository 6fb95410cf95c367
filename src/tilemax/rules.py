"""Move legality and dictionary-backed candidate generation."""

from collections import Counter
from collections.abc import Collection, Iterator

from sortedcontainers import SortedSet

from tilemax.board import Board
from tilemax.move import Direction, Move
from tilemax.solver.config import config as solver_config
from tilemax.wordlist import WordList


def cross_word(board: Board, x: int, y: int, letter: str, direction: Direction) -> str:
    """Return the run of letters through (x, y) along `direction`, with `letter` at (x, y).

    The cell (x, y) itself is assumed empty on `board`.
    """
    dx, dy = direction.step
    before: list[str] = []
    nx, ny = x - dx, y - dy
    while (ch := board.letter_at(nx, ny)) is not None:
        before.append(ch)
        nx, ny = nx - dx, ny - dy
    after: list[str] = []
    nx, ny = x + dx, y + dy
    while (ch := board.letter_at(nx, ny)) is not None:
        after.append(ch)
        nx, ny = nx + dx, ny + dy
    return "".join(reversed(before)) + letter + "".join(after)


class LegalityFilter:
    """Decides which moves may be played on a board, given a dictionary."""

    def __init__(self, dictionary: WordList, *, deterministic: bool | None = None):
        self.dictionary = dictionary
        self.deterministic = (
            solver_config.deterministic if deterministic is None else deterministic
        )

    def is_legal(self, board: Board, move: Move) -> bool:
        """Return whether `move` may be applied to `board`.

        A legal move:

        - fits on the board and spells a word from the dictionary;
        - is the whole run of letters in its direction (the cells just before and after
          it are empty or off the board);
        - agrees with every letter already on the board under it;
        - places at least one new letter, and the letter pool covers all new letters;
        - on a board that already has letters, reuses one or places a letter next to one;
        - only forms perpendicular words that are in the dictionary.
        """
        word = move.word
        if not word or not self.dictionary.contains(word):
            return False
        end_x, end_y = move.end
        if not (board.in_bounds(move.x, move.y) and board.in_bounds(end_x, end_y)):
            return False

        dx, dy = move.direction.step
        if board.letter_at(move.x - dx, move.y - dy) is not None:
            return False
        if board.letter_at(end_x + dx, end_y + dy) is not None:
            return False

        new_cells: list[tuple[int, int, str]] = []
        touches = False
        for (x, y), ch in zip(move.cells(), word):
            existing = board.letter_at(x, y)
            if existing is None:
                new_cells.append((x, y, ch))
                touches = touches or board.has_adjacent_letters(x, y)
            elif existing != ch:
                return False
            else:
                touches = True
        if not new_cells:
            return False

        needed = Counter(ch for _, _, ch in new_cells)
        if any(board.pool[ord(ch) - ord("A")] < count for ch, count in needed.items()):
            return False

        if not touches and not board.is_empty():
            return False

        cross = move.direction.cross
        for x, y, ch in new_cells:
            formed = cross_word(board, x, y, ch, cross)
            if len(formed) > 1 and not self.dictionary.contains(formed):
                return False
        return True

    def candidate_moves(self, board: Board) -> Iterator[Move]:
        """Yield every dictionary word that matches some span of the board.

        Spans are all start cells, both directions and every word length in the dictionary.
        Spans with no empty cell, or that are glued to a letter just before or after them,
        are skipped.  Candidates are not yet checked with `is_legal`.
        """
        size = board.size
        lengths = self.dictionary.lengths
        for direction in Direction:
            dx, dy = direction.step
            for y in range(size):
                for x in range(size):
                    if board.letter_at(x - dx, y - dy) is not None:
                        continue
                    room = size - (x if direction is Direction.ACROSS else y)
                    for length in lengths:
                        if length > room:
                            break
                        if board.letter_at(x + length * dx, y + length * dy) is not None:
                            continue
                        pattern = board.span(x, y, direction, length)
                        if "." not in pattern:
                            continue
                        for word in self.dictionary.match(pattern):
                            yield Move(word, x, y, direction)

    def legal_moves(self, board: Board) -> Collection[Move]:
        """All distinct legal moves on `board`.

        Sorted by `Move.sort_key` when running deterministically.
        """
        legal = (m for m in self.candidate_moves(board) if self.is_legal(board, m))
        if self.deterministic:
            return SortedSet(legal, key=lambda m: m.sort_key)
        return set(legal)
