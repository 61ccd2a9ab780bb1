"""Edit distance between identifier strings.

Uses RapidFuzz's Levenshtein implementation, which computes the exact
unit-cost distance (insertions, deletions and substitutions all cost 1).
"""

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """Minimum number of single-character edits to turn ``a`` into ``b``.

    Args:
        a: First string
        b: Second string

    Returns:
        Edit distance (0 for identical strings, len(a) when b is empty)
    """
    return Levenshtein.distance(a, b)
