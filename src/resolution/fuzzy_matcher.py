"""Fuzzy path matching for node lookups.

Ranks corpus paths against a requested path and applies the three-tier
resolution policy (auto-resolve / suggest / reject).
"""

from collections.abc import Iterable

from src.resolution.confidence import normalize_score
from src.resolution.schemas import FuzzyMatchResult, ScoredCandidate
from src.resolution.scoring import score_similarity
from src.resolution.thresholds import DEFAULT_THRESHOLDS, ResolutionThresholds

# Candidates considered by the policy, and alternatives it reports
POLICY_CANDIDATES = 5
MAX_ALTERNATIVES = 3


class PathMatcher:
    """Scores requested paths against a corpus of known paths.

    Stateless apart from its thresholds, so one instance can be shared
    across threads and tasks.
    """

    def __init__(self, thresholds: ResolutionThresholds = DEFAULT_THRESHOLDS):
        """Initialize matcher with resolution thresholds.

        Args:
            thresholds: Auto-match and suggestion thresholds
        """
        self._thresholds = thresholds

    @property
    def thresholds(self) -> ResolutionThresholds:
        return self._thresholds

    def find_best_matches(
        self,
        query: str,
        candidates: Iterable[str],
        limit: int = 3,
    ) -> list[ScoredCandidate]:
        """Find the best scoring candidates for a query.

        Candidates with a raw score <= 0 are dropped. Ties are broken by
        path so the order is stable across calls.

        Args:
            query: Requested path
            candidates: Known paths to match against
            limit: Maximum number of matches to return

        Returns:
            Scored candidates, highest score first. Empty if nothing
            scored above zero.
        """
        scored: list[ScoredCandidate] = []
        for candidate in dict.fromkeys(candidates):
            score = score_similarity(query, candidate)
            if score <= 0:
                continue
            # An identical path is a certain match whatever its raw score
            confidence = 1.0 if candidate == query else normalize_score(score)
            scored.append(
                ScoredCandidate(path=candidate, score=score, confidence=confidence)
            )

        scored.sort(key=lambda m: (-m.score, m.path))
        return scored[:limit]

    def match(self, query: str, candidates: Iterable[str]) -> FuzzyMatchResult:
        """Apply the resolution policy to a query.

        Behavior by confidence of the best candidate:
        - >= auto_match: matched_path set, alternatives are the runners-up
        - >= suggestion: matched_path None, alternatives lead with the best
        - below: matched_path None, alternatives are low-quality filler
          that callers should not show

        Args:
            query: The requested path that wasn't found exactly
            candidates: All known paths

        Returns:
            FuzzyMatchResult for the query
        """
        matches = self.find_best_matches(query, candidates, limit=POLICY_CANDIDATES)

        if not matches:
            return FuzzyMatchResult(requested_path=query)

        best = matches[0]
        runners_up = [m.path for m in matches[1:] if m.path != best.path]

        if best.confidence >= self._thresholds.auto_match:
            return FuzzyMatchResult(
                requested_path=query,
                matched_path=best.path,
                confidence=best.confidence,
                alternatives=runners_up[:MAX_ALTERNATIVES],
            )

        return FuzzyMatchResult(
            requested_path=query,
            matched_path=None,
            confidence=best.confidence,
            alternatives=[best.path, *runners_up][:MAX_ALTERNATIVES],
        )

    def is_suggestable(self, confidence: float) -> bool:
        """Check if a below-auto confidence is still worth suggesting."""
        return confidence >= self._thresholds.suggestion
