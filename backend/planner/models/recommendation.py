"""Recommendation result models."""

from pydantic import BaseModel, ConfigDict, Field

from backend.planner.models.reference import RegionInfo


class RegionScore(BaseModel):
    """How well a region fits the traveler's vibes and entry point."""

    model_config = ConfigDict(frozen=True)

    region: RegionInfo
    match_score: int = Field(..., ge=0, le=100)
    proximity_score: int = Field(..., ge=0, le=100)
    total_score: int = Field(..., ge=0, le=100)
    is_recommended: bool = False
    is_entry_point_region: bool = False
