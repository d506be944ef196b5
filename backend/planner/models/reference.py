"""Reference data models - shapes of the bundled static tables."""

from pydantic import BaseModel, ConfigDict, Field

from backend.planner.models.common import Coordinates, Vibe


class CityInfo(BaseModel):
    """City within a region."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    coordinates: Coordinates


class RegionInfo(BaseModel):
    """Region with centroid, vibe affinities and member cities."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    tagline: str = ""
    best_for: list[Vibe] = Field(default_factory=list)
    coordinates: Coordinates
    cities: list[CityInfo] = Field(default_factory=list)


class Location(BaseModel):
    """Candidate place the refinement engine may schedule."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    city_id: str
    category: str
    coordinates: Coordinates | None = None
    duration: int | None = Field(default=None, gt=0, description="Typical visit length in minutes")
    kid_friendly: bool = False
    wheelchair_accessible: bool | None = None  # None when unknown


class RailFare(BaseModel):
    """Point-to-point fare between two cities (yen)."""

    model_config = ConfigDict(frozen=True)

    from_city: str
    to_city: str
    fare: int = Field(..., ge=0)


class RailPassTier(BaseModel):
    """Multi-day unlimited rail pass."""

    model_config = ConfigDict(frozen=True)

    name: str
    days: int = Field(..., gt=0)
    price: int = Field(..., gt=0)


class CalendarWindow(BaseModel):
    """Annual month/day window; may wrap over the new year."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    start_month: int = Field(..., ge=1, le=12)
    start_day: int = Field(..., ge=1, le=31)
    end_month: int = Field(..., ge=1, le=12)
    end_day: int = Field(..., ge=1, le=31)
    message: str
    warning_type: str | None = None  # Seasonal windows only

    @property
    def wraps_year(self) -> bool:
        """True when the window runs past Dec 31 into the next year."""
        return (self.start_month, self.start_day) > (self.end_month, self.end_day)
