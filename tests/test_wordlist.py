"""Tests for word list loading and the dictionary oracle."""

import pytest

from tilemax.wordlist import WordList, load_word_list


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\nDOG\n a\nhello-world\n\nzebra\n  Cot  \n", encoding="utf-8")
    return path


class TestLoadWordList:
    """Reading word list files."""

    def test_load(self, word_file):
        assert load_word_list(word_file) == {"CAT", "DOG", "ZEBRA", "COT"}

    def test_max_len(self, word_file):
        assert load_word_list(word_file, max_len=3) == {"CAT", "DOG", "COT"}

    def test_min_len(self, word_file):
        assert "A" in load_word_list(word_file, min_len=1)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_word_list(tmp_path / "nope.txt")

    def test_from_file(self, word_file):
        words = WordList.from_file(word_file)
        assert len(words) == 4
        assert words.contains("zebra")


class TestWordList:
    """Membership and pattern lookup."""

    @pytest.fixture
    def words(self):
        return WordList(["cat", "COT", "cut", "cab", "casa", "at"])

    def test_contains(self, words):
        assert words.contains("CAT")
        assert words.contains("cat")
        assert not words.contains("CATS")
        assert "CASA" in words
        assert 42 not in words

    def test_sorted_iteration(self, words):
        assert list(words) == ["AT", "CAB", "CASA", "CAT", "COT", "CUT"]

    def test_lengths(self, words):
        assert words.lengths == [2, 3, 4]

    def test_match_with_wildcards(self, words):
        assert words.match("C.T") == ["CAT", "COT", "CUT"]
        assert words.match("CA.") == ["CAB", "CAT"]

    def test_match_all_wildcards(self, words):
        assert words.match("...") == ["CAB", "CAT", "COT", "CUT"]

    def test_match_fixed_word(self, words):
        assert words.match("CASA") == ["CASA"]

    def test_match_nothing(self, words):
        assert words.match("X..") == []
        assert words.match(".....") == []

    def test_match_invalid_character(self, words):
        with pytest.raises(ValueError):
            words.match("C?T")

    def test_invalid_word(self):
        with pytest.raises(ValueError):
            WordList(["CAT", "NOT-A-WORD"])

    def test_duplicates_collapse(self):
        assert len(WordList(["cat", "CAT", "Cat"])) == 1
