"""Tests for raw score normalization."""

from src.resolution.confidence import MAX_EXPECTED_SCORE, normalize_score


class TestNormalizeScore:
    """Tests for normalize_score function."""

    def test_max_expected_score_returns_1(self):
        """A score of 70 or more is full confidence."""
        assert normalize_score(MAX_EXPECTED_SCORE) == 1.0
        assert normalize_score(100) == 1.0

    def test_zero_and_negative_return_0(self):
        """Non-positive scores clamp to 0."""
        assert normalize_score(0) == 0.0
        assert normalize_score(-10) == 0.0

    def test_middle_scores_are_proportional(self):
        """35 is halfway to 70."""
        assert normalize_score(35) == 0.5

    def test_rounds_to_2_decimal_places(self):
        """45 / 70 = 0.642857... rounds to 0.64."""
        assert normalize_score(45) == 0.64
        assert normalize_score(63) == 0.9
        assert normalize_score(59) == 0.84

    def test_monotonic(self):
        """Higher raw scores never lower confidence."""
        values = [normalize_score(s) for s in range(-20, 100)]
        assert values == sorted(values)
