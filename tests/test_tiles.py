"""Tests for the letter pool helpers."""

import pytest

from tilemax.tiles import (
    LETTER_POINTS,
    create_letter_pool,
    letter_index,
    letter_points,
    letter_pool_from_counts,
    letter_pool_points,
    letter_pool_to_string,
)


class TestCreateLetterPool:
    """Building pools from tile strings and count vectors."""

    def test_counts_letters(self):
        pool = create_letter_pool("CAAS")
        assert len(pool) == 26
        assert pool[letter_index("A")] == 2
        assert pool[letter_index("C")] == 1
        assert pool[letter_index("S")] == 1
        assert sum(pool) == 4

    def test_case_insensitive(self):
        assert create_letter_pool("casa") == create_letter_pool("CASA")

    def test_empty_string_gives_empty_pool(self):
        assert not any(create_letter_pool(""))

    def test_invalid_character(self):
        with pytest.raises(ValueError):
            create_letter_pool("CA?S")

    def test_too_many_of_one_letter(self):
        with pytest.raises(ValueError):
            create_letter_pool("E" * 256)

    def test_from_counts(self):
        counts = [0] * 26
        counts[0] = 2
        counts[25] = 1
        assert letter_pool_to_string(letter_pool_from_counts(counts)) == "AAZ"

    def test_from_counts_wrong_length(self):
        with pytest.raises(ValueError):
            letter_pool_from_counts([1, 2, 3])

    def test_from_counts_negative(self):
        with pytest.raises(ValueError):
            letter_pool_from_counts([-1] + [0] * 25)


class TestPoints:
    """Letter point values."""

    def test_point_table(self):
        assert len(LETTER_POINTS) == 26
        assert LETTER_POINTS[letter_index("Q")] == 10
        assert LETTER_POINTS[letter_index("C")] == 3

    def test_letter_points(self):
        assert letter_points("CASA") == 3 + 1 + 1 + 1

    def test_pool_points(self):
        assert letter_pool_points(create_letter_pool("CAAS")) == 6
        assert letter_pool_points(create_letter_pool("")) == 0

    def test_letter_index_rejects_lowercase(self):
        with pytest.raises(ValueError):
            letter_index("a")


def test_pool_to_string_is_sorted():
    assert letter_pool_to_string(create_letter_pool("SACA")) == "AACS"
