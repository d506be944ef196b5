"""Day refinement engine.

Turns a qualitative complaint about one day ("too busy", "more food", ...) into
a revised version of that day. Each ``RefinementType`` maps to one handler in
``REFINEMENT_HANDLERS``; handlers are pure and never touch other days. Callers
splice the result back with ``replace_day``.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from math import floor

from pydantic import BaseModel, ConfigDict

from backend.planner.adapters.reference_data import load_locations
from backend.planner.config import get_settings
from backend.planner.models.common import MealType, TimeSlot, TripStyle
from backend.planner.models.reference import Location
from backend.planner.models.trip import (
    LocationSnapshot,
    TravelerProfile,
    Trip,
    TripActivity,
    TripDay,
)
from backend.planner.refinement.scoring import (
    CULTURE_CATEGORIES,
    FOOD_CATEGORIES,
    KID_FRIENDLY_CATEGORIES,
    activity_affinity,
    rank_candidates,
    removal_order,
)
from backend.planner.utils.logging import planning_logger


class RefinementType(str, Enum):
    """Qualitative feedback a traveler can give about one day."""

    too_busy = "too_busy"
    too_light = "too_light"
    more_food = "more_food"
    more_culture = "more_culture"
    more_kid_friendly = "more_kid_friendly"
    more_rest = "more_rest"


class RefinementRequest(BaseModel):
    """Refine ``trip.days[day_index]`` according to ``type``.

    ``candidates`` overrides the bundled location catalog.
    """

    model_config = ConfigDict(frozen=True)

    trip: Trip
    day_index: int
    type: RefinementType
    candidates: list[Location] | None = None


@dataclass(frozen=True)
class RefinementContext:
    """Inputs shared by every handler."""

    profile: TravelerProfile
    candidates: Sequence[Location]


RefinementHandler = Callable[[TripDay, RefinementContext], TripDay]

# Removal share of the removable activities for "too busy", by pace
TOO_BUSY_REMOVAL_SHARE: dict[TripStyle, float] = {
    TripStyle.relaxed: 0.7,
    TripStyle.balanced: 0.5,
    TripStyle.fast: 0.3,
}


CategoryPredicate = Callable[[str, bool], bool]


def _is_food(category: str, kid_friendly: bool) -> bool:
    return category in FOOD_CATEGORIES


def _is_culture(category: str, kid_friendly: bool) -> bool:
    return category in CULTURE_CATEGORIES


def _is_kid_friendly(category: str, kid_friendly: bool) -> bool:
    return kid_friendly or category in KID_FRIENDLY_CATEGORIES


def _location_matches(location: Location, predicate: CategoryPredicate) -> bool:
    return predicate(location.category, location.kid_friendly)


def _activity_matches(activity: TripActivity, predicate: CategoryPredicate) -> bool:
    if activity.location is None:
        return False
    return predicate(activity.location.category, activity.location.kid_friendly)


def _new_activity(
    day: TripDay,
    location: Location,
    time_slot: TimeSlot | None,
    meal_type: MealType | None = None,
    template: TripActivity | None = None,
) -> TripActivity:
    """Build an activity for ``location``; ids are derived, never random.

    When ``template`` is given its timing is reused.
    """
    duration = location.duration or get_settings().refinement_default_duration_min
    return TripActivity(
        id=f"{day.id}-added-{location.id}",
        location_id=location.id,
        location=LocationSnapshot(
            name=location.name,
            category=location.category,
            coordinates=location.coordinates,
            kid_friendly=location.kid_friendly,
        ),
        time_slot=template.time_slot if template else time_slot,
        start_time=template.start_time if template else None,
        end_time=template.end_time if template else None,
        duration=duration,
        meal_type=meal_type,
    )


def _remove(day: TripDay, count: int) -> list[TripActivity]:
    """Drop ``count`` activities in removal priority order."""
    dropped = set(removal_order(day.activities)[:count])
    return [a for i, a in enumerate(day.activities) if i not in dropped]


def _refine_too_busy(day: TripDay, context: RefinementContext) -> TripDay:
    n = len(day.activities)
    if n <= 1:
        return day.model_copy(
            update={"explanation": "This day has only one stop, so it was left as planned."}
        )

    share = TOO_BUSY_REMOVAL_SHARE[context.profile.pace]
    count = max(1, floor((n - 1) * share))
    activities = _remove(day, count)
    stops = "stop" if count == 1 else "stops"
    return day.model_copy(
        update={
            "activities": activities,
            "explanation": f"Removed {count} lower-priority {stops} to make the day more manageable.",
        }
    )


def _refine_too_light(day: TripDay, context: RefinementContext) -> TripDay:
    limit = get_settings().refinement_max_additions
    ranked = rank_candidates(context.candidates, context.profile, day)[:limit]
    if not ranked:
        return day.model_copy(
            update={"explanation": "No additional places were found nearby for this day."}
        )

    added = [_new_activity(day, location, TimeSlot.afternoon) for location, _ in ranked]
    names = ", ".join(location.name for location, _ in ranked)
    # Afternoon additions go ahead of any evening plans
    at = next(
        (i for i, a in enumerate(day.activities) if a.time_slot == TimeSlot.evening),
        len(day.activities),
    )
    return day.model_copy(
        update={
            "activities": [*day.activities[:at], *added, *day.activities[at:]],
            "explanation": f"Added {names} to fill out the afternoon.",
        }
    )


def _refine_toward(
    day: TripDay,
    context: RefinementContext,
    predicate: CategoryPredicate,
    label: str,
    insert: Callable[[TripDay, Location], list[TripActivity]],
) -> TripDay:
    """Bias a day toward one category group.

    Replaces the lowest-affinity non-matching activity when the day has at
    least three stops; otherwise inserts the best matching candidate.
    """
    ranked = rank_candidates(context.candidates, context.profile, day)
    best = next((location for location, _ in ranked if _location_matches(location, predicate)), None)
    if best is None:
        return day.model_copy(
            update={"explanation": f"No {label} options were available for this day."}
        )

    activities = day.activities
    non_matching = [i for i, a in enumerate(activities) if not _activity_matches(a, predicate)]

    if len(activities) >= 3 and non_matching:
        # Lowest affinity first; later in the day on ties
        target_index = min(non_matching, key=lambda i: (activity_affinity(activities[i]), -i))
        target = activities[target_index]
        replacement = _new_activity(day, best, None, meal_type=target.meal_type, template=target)
        updated = list(activities)
        updated[target_index] = replacement
        explanation = f"Swapped {_activity_name(target)} for {best.name} to add more {label}."
    else:
        updated = insert(day, best)
        explanation = f"Added {best.name} for more {label}."

    return day.model_copy(update={"activities": updated, "explanation": explanation})


def _activity_name(activity: TripActivity) -> str:
    return activity.location.name if activity.location else activity.location_id


def _insert_lunch(day: TripDay, location: Location) -> list[TripActivity]:
    """Insert before the first afternoon or evening stop, else at the end."""
    activity = _new_activity(day, location, TimeSlot.afternoon, meal_type=MealType.lunch)
    later = (TimeSlot.afternoon, TimeSlot.evening)
    at = next(
        (i for i, a in enumerate(day.activities) if a.time_slot in later),
        len(day.activities),
    )
    return [*day.activities[:at], activity, *day.activities[at:]]


def _insert_first(day: TripDay, location: Location) -> list[TripActivity]:
    return [_new_activity(day, location, TimeSlot.morning), *day.activities]


def _insert_last(day: TripDay, location: Location) -> list[TripActivity]:
    return [*day.activities, _new_activity(day, location, TimeSlot.afternoon)]


def _refine_more_food(day: TripDay, context: RefinementContext) -> TripDay:
    return _refine_toward(day, context, _is_food, "local food", _insert_lunch)


def _refine_more_culture(day: TripDay, context: RefinementContext) -> TripDay:
    return _refine_toward(day, context, _is_culture, "cultural sights", _insert_first)


def _refine_more_kid_friendly(day: TripDay, context: RefinementContext) -> TripDay:
    return _refine_toward(day, context, _is_kid_friendly, "kid-friendly fun", _insert_last)


def _refine_more_rest(day: TripDay, context: RefinementContext) -> TripDay:
    buffer = get_settings().refinement_rest_buffer_min
    count = len(day.activities) // 3
    if count:
        stops = "stop" if count == 1 else "stops"
        explanation = f"Removed {count} {stops} and added {buffer} minutes of rest between activities."
    else:
        explanation = f"Added {buffer} minutes of rest between activities."
    return day.model_copy(
        update={
            "activities": _remove(day, count),
            "rest_buffer_minutes": buffer,
            "explanation": explanation,
        }
    )


REFINEMENT_HANDLERS: dict[RefinementType, RefinementHandler] = {
    RefinementType.too_busy: _refine_too_busy,
    RefinementType.too_light: _refine_too_light,
    RefinementType.more_food: _refine_more_food,
    RefinementType.more_culture: _refine_more_culture,
    RefinementType.more_kid_friendly: _refine_more_kid_friendly,
    RefinementType.more_rest: _refine_more_rest,
}


def candidates_for_day(day: TripDay, candidates: Sequence[Location]) -> list[Location]:
    """Locations in the day's city that the day does not already visit.

    A day without a city accepts candidates from any city.
    """
    used = {a.location_id for a in day.activities}
    return [
        location
        for location in candidates
        if location.id not in used and (day.city_id is None or location.city_id == day.city_id)
    ]


def refine_day(request: RefinementRequest) -> TripDay:
    """Produce a revised version of one day.

    Args:
        request: Trip, zero-based day index, refinement type and optional
            candidate locations

    Returns:
        New day with the same id, date and city as the original

    Raises:
        ValueError: If ``day_index`` does not address a day of the trip
    """
    days = request.trip.days
    if not 0 <= request.day_index < len(days):
        raise ValueError(f"Day index {request.day_index} out of range for {len(days)} days")

    day = days[request.day_index]
    pool = load_locations() if request.candidates is None else request.candidates
    context = RefinementContext(
        profile=request.trip.traveler_profile,
        candidates=candidates_for_day(day, pool),
    )

    refined = REFINEMENT_HANDLERS[request.type](day, context)

    before_ids = [a.id for a in day.activities]
    after_ids = [a.id for a in refined.activities]
    planning_logger.log_refinement(
        request.type.value,
        day.id,
        before_count=len(before_ids),
        after_count=len(after_ids),
        added=[i for i in after_ids if i not in before_ids],
        removed=[i for i in before_ids if i not in after_ids],
    )
    return refined
