"""Common types and enums shared across all models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """Geographic coordinates (WGS84)."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Vibe(str, Enum):
    """High-level travel style used to score regions."""

    cultural_heritage = "cultural_heritage"
    foodie_paradise = "foodie_paradise"
    neon_nightlife = "neon_nightlife"
    nature_adventure = "nature_adventure"
    hidden_gems = "hidden_gems"


class Interest(str, Enum):
    """Traveler interest category."""

    culture = "culture"
    food = "food"
    nature = "nature"
    nightlife = "nightlife"
    shopping = "shopping"
    photography = "photography"
    wellness = "wellness"
    history = "history"
    art = "art"


class TripStyle(str, Enum):
    """Traveler pace preference."""

    relaxed = "relaxed"
    balanced = "balanced"
    fast = "fast"


class TimeSlot(str, Enum):
    """Coarse part of the day an activity belongs to."""

    morning = "morning"
    afternoon = "afternoon"
    evening = "evening"


class MealType(str, Enum):
    """Meal tag for food activities."""

    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class EntryPointType(str, Enum):
    """Kind of arrival location."""

    airport = "airport"
    city = "city"
    hotel = "hotel"
    station = "station"


class GroupType(str, Enum):
    """Traveling party composition."""

    solo = "solo"
    couple = "couple"
    family = "family"
    friends = "friends"
    business = "business"
