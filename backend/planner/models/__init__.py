"""Models package - re-exports for convenience."""

from backend.planner.models.common import (
    Coordinates,
    EntryPointType,
    GroupType,
    Interest,
    MealType,
    TimeSlot,
    TripStyle,
    Vibe,
)
from backend.planner.models.economics import Journey, RailPassValue
from backend.planner.models.reasoning import (
    KNOWN_FACTORS,
    FactorDetail,
    ReasonFactor,
    RecommendationReason,
    RecommendationReasonObject,
    reason_from_object,
    reason_to_object,
)
from backend.planner.models.recommendation import RegionScore
from backend.planner.models.reference import (
    CalendarWindow,
    CityInfo,
    Location,
    RailFare,
    RailPassTier,
    RegionInfo,
)
from backend.planner.models.trip import (
    Itinerary,
    LocationSnapshot,
    TravelerProfile,
    Trip,
    TripActivity,
    TripDay,
)
from backend.planner.models.trip_builder import (
    Accessibility,
    EntryPoint,
    TripBuilderData,
    TripDates,
)
from backend.planner.models.warnings import (
    PlanningWarning,
    WarningsSummary,
    WarningSeverity,
    WarningType,
)

__all__ = [
    # Common
    "Coordinates",
    "Vibe",
    "Interest",
    "TripStyle",
    "TimeSlot",
    "MealType",
    "EntryPointType",
    "GroupType",
    # Trip builder
    "TripBuilderData",
    "TripDates",
    "EntryPoint",
    "Accessibility",
    # Trip
    "Itinerary",
    "Trip",
    "TripDay",
    "TripActivity",
    "LocationSnapshot",
    "TravelerProfile",
    # Reasoning
    "RecommendationReason",
    "RecommendationReasonObject",
    "ReasonFactor",
    "FactorDetail",
    "KNOWN_FACTORS",
    "reason_to_object",
    "reason_from_object",
    # Reference
    "RegionInfo",
    "CityInfo",
    "Location",
    "RailFare",
    "RailPassTier",
    "CalendarWindow",
    # Results
    "RegionScore",
    "RailPassValue",
    "Journey",
    "PlanningWarning",
    "WarningsSummary",
    "WarningSeverity",
    "WarningType",
]
