"""Raw score to confidence normalization."""

# Score of a same-filename match with two matching ancestor directories
MAX_EXPECTED_SCORE = 70


def normalize_score(score: int) -> float:
    """Map a raw similarity score onto a 0-1 confidence.

    Rules:
    - score / 70, clamped to [0, 1]
    - Rounded to 2 decimal places

    Args:
        score: Raw similarity score (may be negative)

    Returns:
        Confidence from 0.0 to 1.0
    """
    normalized = max(0.0, min(1.0, score / MAX_EXPECTED_SCORE))
    return round(normalized, 2)
