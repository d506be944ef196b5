"""Recommendation reasoning models and conversion between encodings.

Two shapes exist for the same data: the display form keeps factors as an
ordered list of ``{factor, score, reasoning}`` entries, while the object form
keys the details by factor name. Only the seven known factors survive a
list -> object conversion; anything else is dropped.
"""

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

FactorKey = Literal[
    "interest",
    "proximity",
    "budget",
    "accessibility",
    "time",
    "weather",
    "groupFit",
]

KNOWN_FACTORS: tuple[str, ...] = get_args(FactorKey)


class ReasonFactor(BaseModel):
    """One scored factor in display form."""

    model_config = ConfigDict(frozen=True)

    factor: str
    score: float = Field(..., ge=0, le=100)
    reasoning: str


class FactorDetail(BaseModel):
    """Score and explanation for a named factor."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0, le=100)
    reasoning: str


class RecommendationReason(BaseModel):
    """Why an activity was recommended (display form)."""

    model_config = ConfigDict(frozen=True)

    primary_reason: str
    factors: list[ReasonFactor] = Field(default_factory=list)
    alternatives_considered: list[str] | None = None

    @property
    def average_score(self) -> float | None:
        """Mean factor score, or None when there are no factors."""
        if not self.factors:
            return None
        return sum(f.score for f in self.factors) / len(self.factors)


class RecommendationReasonObject(BaseModel):
    """Why an activity was recommended (factors keyed by name)."""

    model_config = ConfigDict(frozen=True)

    primary_reason: str
    factors: dict[FactorKey, FactorDetail] = Field(default_factory=dict)
    alternatives_considered: list[str] | None = None


def reason_to_object(reason: RecommendationReason) -> RecommendationReasonObject:
    """Convert the list form to the keyed form, dropping unknown factors.

    When a factor name repeats, the last entry wins.
    """
    factors: dict[str, FactorDetail] = {}
    for entry in reason.factors:
        if entry.factor not in KNOWN_FACTORS:
            continue
        factors[entry.factor] = FactorDetail(score=entry.score, reasoning=entry.reasoning)

    return RecommendationReasonObject(
        primary_reason=reason.primary_reason,
        factors=factors,
        alternatives_considered=reason.alternatives_considered,
    )


def reason_from_object(reason: RecommendationReasonObject) -> RecommendationReason:
    """Convert the keyed form back to the list form, keeping key order."""
    return RecommendationReason(
        primary_reason=reason.primary_reason,
        factors=[
            ReasonFactor(factor=name, score=detail.score, reasoning=detail.reasoning)
            for name, detail in reason.factors.items()
        ],
        alternatives_considered=reason.alternatives_considered,
    )
