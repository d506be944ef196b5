"""Transportation economics result models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from backend.planner.models.reference import RailPassTier


class Journey(BaseModel):
    """One leg between consecutive cities; fare is None when unknown."""

    model_config = ConfigDict(frozen=True)

    from_city: str
    to_city: str
    fare: int | None = None


class RailPassValue(BaseModel):
    """Whether a rail pass beats point-to-point fares."""

    model_config = ConfigDict(frozen=True)

    recommendation: Literal["save", "skip"]
    individual_total: int
    pass_type: RailPassTier | None
    savings: int
    journeys: list[Journey]
