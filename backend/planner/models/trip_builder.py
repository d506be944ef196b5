"""Trip builder models - traveler intent collected before planning.

``TripBuilderData`` is the only persisted "intent" of a planning session. It is
normalized whenever it is constructed: duplicate and blank entries are dropped,
unknown vibes/interests are discarded, and list lengths are capped. Callers
never need to sanitize it at the point of use.
"""

from collections.abc import Iterable
from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from backend.planner.config import get_settings
from backend.planner.models.common import Coordinates, EntryPointType, Interest, TripStyle, Vibe


def _unique_strings(values: Any) -> list[str]:
    """Trim, drop blanks and de-duplicate while keeping first-seen order."""
    if not isinstance(values, Iterable) or isinstance(values, str):
        return []
    seen: list[str] = []
    for value in values:
        if isinstance(value, Enum):
            value = value.value
        if not isinstance(value, str):
            continue
        value = value.strip()
        if value and value not in seen:
            seen.append(value)
    return seen


def _known_only(values: Any, allowed: set[str], limit: int) -> list[str]:
    result: list[str] = []
    for value in _unique_strings(values):
        if value not in allowed:
            continue
        result.append(value)
        if len(result) >= limit:
            break
    return result


class TripDates(BaseModel):
    """Optional trip start and end dates."""

    model_config = ConfigDict(frozen=True)

    start: date | None = None
    end: date | None = None


class EntryPoint(BaseModel):
    """Traveler's arrival location, used as the proximity anchor."""

    model_config = ConfigDict(frozen=True)

    type: EntryPointType
    id: str
    name: str
    coordinates: Coordinates
    region_id: str | None = None


class Accessibility(BaseModel):
    """Accessibility and dietary needs."""

    model_config = ConfigDict(frozen=True)

    mobility: bool = False
    dietary: list[str] = Field(default_factory=list)
    dietary_other: str | None = None
    notes: str | None = None

    @field_validator("dietary", mode="before")
    @classmethod
    def normalize_dietary(cls, v: Any) -> list[str]:
        """Trim and de-duplicate dietary entries."""
        return _unique_strings(v)

    @field_validator("dietary_other", "notes", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> str | None:
        """Drop empty free-text fields."""
        if not isinstance(v, str):
            return None
        v = v.strip()
        return v or None

    def is_empty(self) -> bool:
        """True when no accessibility information is carried."""
        return not self.mobility and not self.dietary and not self.dietary_other and not self.notes


class TripBuilderData(BaseModel):
    """Normalized traveler preferences for a trip."""

    model_config = ConfigDict(frozen=True)

    dates: TripDates = Field(default_factory=TripDates)
    duration: int | None = Field(default=None, gt=0)
    regions: list[str] = Field(default_factory=list)
    cities: list[str] = Field(default_factory=list)
    vibes: list[Vibe] = Field(default_factory=list)
    interests: list[Interest] = Field(default_factory=list)
    style: TripStyle | None = None
    entry_point: EntryPoint | None = None
    accessibility: Accessibility | None = None

    @field_validator("regions", "cities", mode="before")
    @classmethod
    def normalize_ids(cls, v: Any) -> list[str]:
        """De-duplicate ids, dropping blanks."""
        return _unique_strings(v)

    @field_validator("vibes", mode="before")
    @classmethod
    def normalize_vibes(cls, v: Any) -> list[str]:
        """Keep known vibes only, in insertion order, capped."""
        return _known_only(v, {vibe.value for vibe in Vibe}, get_settings().max_vibes)

    @field_validator("interests", mode="before")
    @classmethod
    def normalize_interests(cls, v: Any) -> list[str]:
        """Keep known interests only, in insertion order, capped."""
        return _known_only(
            v, {interest.value for interest in Interest}, get_settings().max_interests
        )

    @field_validator("style", mode="before")
    @classmethod
    def normalize_style(cls, v: Any) -> TripStyle | None:
        """Drop unrecognised styles instead of rejecting the whole payload."""
        if isinstance(v, TripStyle):
            return v
        if isinstance(v, str) and v in {style.value for style in TripStyle}:
            return TripStyle(v)
        return None

    @field_validator("accessibility", mode="after")
    @classmethod
    def drop_empty_accessibility(cls, v: Accessibility | None) -> Accessibility | None:
        """Accessibility that carries nothing is not stored."""
        if v is None or v.is_empty():
            return None
        return v

    @property
    def trip_length(self) -> int | None:
        """Trip length in days: explicit duration, else derived from dates."""
        if self.duration is not None:
            return self.duration
        if self.dates.start and self.dates.end and self.dates.end >= self.dates.start:
            return (self.dates.end - self.dates.start).days + 1
        return None

    def with_changes(self, **changes: Any) -> "TripBuilderData":
        """Return a re-normalized copy with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return TripBuilderData.model_validate(data)
