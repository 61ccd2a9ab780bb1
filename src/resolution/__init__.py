"""Fuzzy path resolution for node lookups.

This module provides:
- PathMatcher: ranks corpus paths and applies the auto/suggest/reject policy
- PathResolver: batch resolution (exact -> fuzzy) against the node store
- Segment-based similarity scoring and confidence normalization
- Schemas for match results and batch reports
"""

from src.resolution.confidence import normalize_score
from src.resolution.edit_distance import levenshtein_distance
from src.resolution.fuzzy_matcher import PathMatcher
from src.resolution.resolver import NodeNotFoundError, PathResolver, resolve_paths
from src.resolution.schemas import (
    BatchResolution,
    FuzzyMatchInfo,
    FuzzyMatchResult,
    PathResolution,
    ResolutionOutcome,
    ScoredCandidate,
)
from src.resolution.scoring import score_similarity
from src.resolution.thresholds import (
    AUTO_MATCH_THRESHOLD,
    SUGGESTION_THRESHOLD,
    ResolutionThresholds,
)

__all__ = [
    "AUTO_MATCH_THRESHOLD",
    "SUGGESTION_THRESHOLD",
    "BatchResolution",
    "FuzzyMatchInfo",
    "FuzzyMatchResult",
    "NodeNotFoundError",
    "PathMatcher",
    "PathResolution",
    "PathResolver",
    "ResolutionOutcome",
    "ResolutionThresholds",
    "ScoredCandidate",
    "levenshtein_distance",
    "normalize_score",
    "resolve_paths",
    "score_similarity",
]
