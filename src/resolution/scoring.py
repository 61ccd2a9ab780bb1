"""Segment-based similarity scoring for slash-delimited paths.

A path splits into directory segments and a filename. The filename term
dominates; directory segments are compared position by position, and a
penalty applies when the two paths sit at different depths.

Segment comparison separates three cases:
- prefix-related segments ("extract" vs "extractor") are near-misses
- segments within a small edit distance are typos
- anything else is a different module, which costs far more than the
  shared filename and ancestors can earn back, but never drops a
  positive score to zero
"""

from typing import NamedTuple

from src.resolution.edit_distance import levenshtein_distance

FILENAME_MATCH_BONUS = 50
FILENAME_PARTIAL_CREDIT = 20
FILENAME_EDIT_WEIGHT = 2

SEGMENT_MATCH_BONUS = 10
SEGMENT_PREFIX_BONUS = 5
DEPTH_PENALTY = 5

# Charged on top of the edit distance when two segments name different modules
UNRELATED_SEGMENT_PENALTY = 30
# Lowest score the module penalty can push an otherwise positive score to
UNRELATED_SCORE_FLOOR = 1

# A segment mismatch counts as a typo while edits * ratio <= segment length
TYPO_LENGTH_RATIO = 3


class PathParts(NamedTuple):
    """A path split into its directory segments and filename."""

    directories: list[str]
    filename: str


def split_path(path: str) -> PathParts:
    """Split a path on '/' into (directories, filename).

    The last segment is the filename; everything before it, in order,
    is the directory path. An empty string yields no directories and an
    empty filename.
    """
    parts = path.split("/")
    return PathParts(directories=parts[:-1], filename=parts[-1])


def _filename_score(query: str, candidate: str) -> int:
    if query == candidate:
        return FILENAME_MATCH_BONUS
    distance = levenshtein_distance(query, candidate)
    return max(0, FILENAME_PARTIAL_CREDIT - FILENAME_EDIT_WEIGHT * distance)


def is_typo(query_segment: str, candidate_segment: str, distance: int) -> bool:
    """Check whether a segment mismatch is small enough to be a typo."""
    longest = max(len(query_segment), len(candidate_segment))
    return distance * TYPO_LENGTH_RATIO <= longest


def _compare_segments(query_segment: str, candidate_segment: str) -> tuple[int, int]:
    """Return (similarity, module penalty) for one pair of segments."""
    if query_segment == candidate_segment:
        return SEGMENT_MATCH_BONUS, 0

    if candidate_segment.startswith(query_segment) or query_segment.startswith(
        candidate_segment
    ):
        # Missing or extra suffix, e.g. "build" vs "builder"
        return (
            SEGMENT_PREFIX_BONUS - abs(len(query_segment) - len(candidate_segment)),
            0,
        )

    distance = levenshtein_distance(query_segment, candidate_segment)
    if is_typo(query_segment, candidate_segment, distance):
        return -distance, 0
    return -distance, UNRELATED_SEGMENT_PENALTY


def segment_score(query_segment: str, candidate_segment: str) -> int:
    """Score one pair of directory segments at the same depth.

    Args:
        query_segment: Segment from the requested path
        candidate_segment: Segment from the candidate path at the same index

    Returns:
        Signed score contribution for this segment pair, including the
        different-module penalty
    """
    similarity, penalty = _compare_segments(query_segment, candidate_segment)
    return similarity - penalty


def score_similarity(query: str, candidate: str) -> int:
    """Score how similar a candidate path is to the requested one.

    Higher is more similar; the result can be negative.

    Scoring factors:
    - Identical filename: +50, otherwise max(0, 20 - 2 * edit distance)
    - Per directory segment at the same depth: see segment_score()
    - Different directory depth: -5 per level of difference

    The different-module penalty never takes a positive score below
    UNRELATED_SCORE_FLOOR, so a candidate that shares a filename or
    ancestors with a missing module stays available as a low-confidence
    alternative.

    Args:
        query: The requested path
        candidate: A candidate path to compare against

    Returns:
        Raw similarity score
    """
    query_parts = split_path(query)
    candidate_parts = split_path(candidate)

    score = _filename_score(query_parts.filename, candidate_parts.filename)
    module_penalty = 0

    for query_segment, candidate_segment in zip(
        query_parts.directories, candidate_parts.directories
    ):
        similarity, penalty = _compare_segments(query_segment, candidate_segment)
        score += similarity
        module_penalty += penalty

    depth_diff = abs(len(query_parts.directories) - len(candidate_parts.directories))
    score -= DEPTH_PENALTY * depth_diff

    if not module_penalty:
        return score
    return max(score - module_penalty, min(score, UNRELATED_SCORE_FLOOR))
