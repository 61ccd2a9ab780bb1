"""Path resolution schemas.

Defines data models for scored candidates, single-path resolution
results, and batch resolution reports.
"""

from enum import Enum

from pydantic import BaseModel, Field


class ScoredCandidate(BaseModel):
    """A corpus path scored against a query."""

    path: str = Field(description="Candidate path from the corpus")
    score: int = Field(description="Raw similarity score (may be negative)")
    confidence: float = Field(ge=0.0, le=1.0, description="Normalized score (0-1)")


class FuzzyMatchResult(BaseModel):
    """Outcome of the resolution policy for one requested path.

    matched_path is only set when the best candidate clears the auto-match
    threshold. Below it, alternatives carry what the match would have been.
    """

    requested_path: str = Field(description="Path as requested, echoed verbatim")
    matched_path: str | None = Field(
        default=None, description="Substitute path if confident enough"
    )
    confidence: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Confidence of the best candidate"
    )
    alternatives: list[str] = Field(
        default_factory=list,
        max_length=3,
        description="Other close matches (never includes matched_path)",
    )


class FuzzyMatchInfo(BaseModel):
    """Audit record for a path that was substituted by fuzzy matching."""

    requested_path: str = Field(description="Path that was originally requested")
    actual_path: str = Field(description="Path that was actually used")
    confidence: float = Field(ge=0.0, le=1.0, description="Match confidence (0-1)")
    alternatives: list[str] = Field(
        default_factory=list, description="Other close matches"
    )

    @property
    def note(self) -> str:
        """Human-readable note for end users."""
        return (
            f"`{self.requested_path}` → `{self.actual_path}` "
            f"({self.confidence:.0%} confidence)"
        )


class ResolutionOutcome(str, Enum):
    """Which bucket a requested path landed in."""

    EXACT = "exact"
    FUZZY = "fuzzy"
    UNRESOLVED = "unresolved"


class PathResolution(BaseModel):
    """Classification of one requested path within a batch."""

    requested_path: str = Field(description="Path as requested")
    outcome: ResolutionOutcome = Field(description="How the path was resolved")
    resolved_path: str | None = Field(
        default=None, description="Corpus path used (None when unresolved)"
    )
    confidence: float = Field(ge=0.0, le=1.0, description="1.0 for exact matches")
    alternatives: list[str] = Field(
        default_factory=list, description="Other close matches for fuzzy results"
    )
    suggestions: list[str] = Field(
        default_factory=list,
        max_length=3,
        description="'Did you mean' paths for unresolved results",
    )

    @property
    def is_resolved(self) -> bool:
        return self.outcome != ResolutionOutcome.UNRESOLVED

    @property
    def error_message(self) -> str | None:
        """Not-found message for unresolved paths, None otherwise."""
        if self.is_resolved:
            return None
        if self.suggestions:
            return (
                f"Node not found: {self.requested_path} "
                f"(did you mean: {', '.join(self.suggestions)}?)"
            )
        return f"Node not found: {self.requested_path}"

    def to_fuzzy_match_info(self) -> FuzzyMatchInfo | None:
        """Audit record for fuzzy results, None for the other buckets."""
        if self.outcome != ResolutionOutcome.FUZZY or self.resolved_path is None:
            return None
        return FuzzyMatchInfo(
            requested_path=self.requested_path,
            actual_path=self.resolved_path,
            confidence=self.confidence,
            alternatives=self.alternatives,
        )


class BatchResolution(BaseModel):
    """Per-request results plus the fuzzy matches that were applied."""

    results: list[PathResolution] = Field(
        default_factory=list, description="One entry per requested path, in order"
    )
    fuzzy_matches: list[FuzzyMatchInfo] = Field(
        default_factory=list, description="Substitutions made by fuzzy matching"
    )

    @property
    def errors(self) -> list[str]:
        """Not-found messages for every unresolved path."""
        return [r.error_message for r in self.results if r.error_message]

    @property
    def resolved_paths(self) -> list[str]:
        """Corpus paths for every resolved request, duplicates removed."""
        seen: dict[str, None] = {}
        for result in self.results:
            if result.resolved_path is not None:
                seen.setdefault(result.resolved_path, None)
        return list(seen)
