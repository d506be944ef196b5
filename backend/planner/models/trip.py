"""Trip and itinerary models - the planned, day-by-day output.

All models are frozen. Edits produce new values through ``model_copy`` so that
untouched days keep their object identity.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, model_validator

from backend.planner.models.common import (
    Coordinates,
    GroupType,
    Interest,
    MealType,
    TimeSlot,
    TripStyle,
)
from backend.planner.models.reasoning import RecommendationReason


class LocationSnapshot(BaseModel):
    """Denormalized copy of the place an activity visits."""

    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    coordinates: Coordinates | None = None
    kid_friendly: bool = False


class TripActivity(BaseModel):
    """Single stop within a day."""

    model_config = ConfigDict(frozen=True)

    id: str
    location_id: str
    location: LocationSnapshot | None = None
    time_slot: TimeSlot | None = None
    start_time: dt.time | None = None
    end_time: dt.time | None = None
    duration: int = Field(..., gt=0, description="Minutes")
    meal_type: MealType | None = None
    reasoning: RecommendationReason | None = None

    @model_validator(mode="after")
    def validate_timing(self) -> "TripActivity":
        """Require a time slot or an explicit start/end pair."""
        has_window = self.start_time is not None and self.end_time is not None
        if self.time_slot is None and not has_window:
            raise ValueError("activity needs a time_slot or both start_time and end_time")
        if has_window and self.end_time < self.start_time:  # type: ignore[operator]
            raise ValueError("end_time must be >= start_time")
        return self

    @property
    def category(self) -> str | None:
        """Category of the visited location, when known."""
        return self.location.category if self.location else None


class TripDay(BaseModel):
    """Activities planned for one day, in intended execution order."""

    model_config = ConfigDict(frozen=True)

    id: str
    date: dt.date | None = None
    city_id: str | None = None
    activities: list[TripActivity] = Field(default_factory=list)
    rest_buffer_minutes: int | None = Field(default=None, ge=0)
    explanation: str | None = None

    @property
    def total_duration(self) -> int:
        """Scheduled minutes across all activities."""
        return sum(a.duration for a in self.activities)


class Itinerary(BaseModel):
    """Ordered collection of days."""

    model_config = ConfigDict(frozen=True)

    days: list[TripDay] = Field(default_factory=list)

    def find_day(self, day_id: str) -> TripDay | None:
        """Look up a day by id."""
        for day in self.days:
            if day.id == day_id:
                return day
        return None


class TravelerProfile(BaseModel):
    """Traveler traits consulted when refining days."""

    model_config = ConfigDict(frozen=True)

    pace: TripStyle = TripStyle.balanced
    interests: list[Interest] = Field(default_factory=list)
    mobility_required: bool = False
    group_type: GroupType = GroupType.solo
    has_children: bool = False


class Trip(Itinerary):
    """A named itinerary owned by one planning session."""

    id: str
    name: str
    updated_at: dt.datetime | None = None
    traveler_profile: TravelerProfile = Field(default_factory=TravelerProfile)
