"""Confidence thresholds for the resolution policy.

The defaults are named constants rather than settings: moving either one
changes which paths get silently substituted, so it has to be a code change
with tests, not an environment variable.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Confidence at or above which a fuzzy match is substituted automatically
AUTO_MATCH_THRESHOLD = 0.7

# Confidence at or above which a match is still offered as a suggestion
SUGGESTION_THRESHOLD = 0.4


class ResolutionThresholds(BaseModel):
    """Pair of thresholds used by a PathMatcher.

    Injected at construction so callers with different strictness can
    each hold their own policy.
    """

    model_config = ConfigDict(frozen=True)

    auto_match: float = Field(
        default=AUTO_MATCH_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Minimum confidence to auto-resolve",
    )
    suggestion: float = Field(
        default=SUGGESTION_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Minimum confidence to surface as a suggestion",
    )

    @model_validator(mode="after")
    def _check_ordering(self) -> "ResolutionThresholds":
        if self.suggestion >= self.auto_match:
            msg = (
                f"suggestion threshold ({self.suggestion}) must be below "
                f"auto-match threshold ({self.auto_match})"
            )
            raise ValueError(msg)
        return self


DEFAULT_THRESHOLDS = ResolutionThresholds()
