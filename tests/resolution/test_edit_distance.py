"""Tests for Levenshtein edit distance."""

import pytest

from src.resolution.edit_distance import levenshtein_distance


class TestLevenshteinDistance:
    """Tests for levenshtein_distance function."""

    def test_identical_strings_return_0(self):
        """Identical strings need no edits."""
        assert levenshtein_distance("hello", "hello") == 0
        assert levenshtein_distance("", "") == 0

    def test_empty_string_returns_other_length(self):
        """Distance to an empty string is the other string's length."""
        assert levenshtein_distance("hello", "") == 5
        assert levenshtein_distance("", "world") == 5

    def test_single_edits(self):
        """Substitution, insertion and deletion each cost 1."""
        assert levenshtein_distance("cat", "bat") == 1
        assert levenshtein_distance("cat", "cats") == 1
        assert levenshtein_distance("cats", "cat") == 1

    def test_multiple_edits(self):
        """Known multi-edit pairs."""
        assert levenshtein_distance("kitten", "sitting") == 3
        assert levenshtein_distance("extract", "extractor") == 2
        assert levenshtein_distance("build", "builder") == 2

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            ("abc", "def"),
            ("extractor", "generator"),
            ("src/api", "lib/utils"),
            ("", "x"),
        ],
    )
    def test_symmetric(self, a: str, b: str):
        """distance(a, b) == distance(b, a)."""
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    def test_is_case_sensitive(self):
        """No case folding is applied."""
        assert levenshtein_distance("Extractor", "extractor") == 1
