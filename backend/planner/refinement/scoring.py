"""Scoring helpers for day refinement.

Two scores drive the refinement policies:

- activity affinity: how well an already-planned activity fits, taken from its
  recommendation factors (neutral 50 when it has none)
- candidate score: how well an unscheduled location fits the traveler and the
  day it would join
"""

from collections.abc import Sequence

from backend.planner.models.common import GroupType, Interest
from backend.planner.models.reference import Location
from backend.planner.models.trip import TravelerProfile, TripActivity, TripDay

NEUTRAL_AFFINITY = 50.0

FOOD_CATEGORIES = frozenset({"restaurant", "market", "cafe", "izakaya"})
CULTURE_CATEGORIES = frozenset({"temple", "shrine", "museum", "historic", "castle"})
KID_FRIENDLY_CATEGORIES = frozenset(
    {"park", "garden", "aquarium", "zoo", "entertainment", "museum"}
)

INTEREST_CATEGORIES: dict[Interest, frozenset[str]] = {
    Interest.culture: frozenset({"temple", "shrine", "historic", "castle"}),
    Interest.food: FOOD_CATEGORIES,
    Interest.nature: frozenset({"park", "garden", "nature", "viewpoint"}),
    Interest.nightlife: frozenset({"bar", "izakaya", "entertainment"}),
    Interest.shopping: frozenset({"shopping", "market"}),
    Interest.photography: frozenset({"viewpoint", "garden", "shrine"}),
    Interest.wellness: frozenset({"onsen", "garden", "cafe"}),
    Interest.history: frozenset({"historic", "castle", "museum", "temple"}),
    Interest.art: frozenset({"museum", "gallery"}),
}

# Categories that suit each travel party; solo travelers get no group bonus
GROUP_CATEGORIES: dict[GroupType, frozenset[str]] = {
    GroupType.couple: frozenset({"garden", "cafe", "onsen", "viewpoint"}),
    GroupType.friends: frozenset({"bar", "izakaya", "entertainment"}),
    GroupType.family: frozenset({"park", "zoo", "aquarium", "entertainment"}),
    GroupType.business: frozenset({"restaurant", "museum"}),
}


def activity_affinity(activity: TripActivity) -> float:
    """Mean recommendation factor score for an activity."""
    if activity.reasoning is None:
        return NEUTRAL_AFFINITY
    average = activity.reasoning.average_score
    return NEUTRAL_AFFINITY if average is None else average


def interest_match(category: str, interests: Sequence[Interest]) -> bool:
    """True when the category serves any of the traveler's interests."""
    return any(category in INTEREST_CATEGORIES.get(interest, ()) for interest in interests)


def score_candidate(location: Location, profile: TravelerProfile, day: TripDay) -> int:
    """Score 0-100 for adding ``location`` to ``day``.

    Scoring components:
    1. Interest fit: +30 when the category serves a traveler interest
    2. Variety: +10 when the category is not already on the day
    3. Children: +10 for kid-friendly places when traveling with children
    4. Party fit: +5 when the category suits the traveler's group type
    5. Mobility: when mobility support is required, +10 for places known to be
       wheelchair accessible and -30 for places known not to be
    """
    score = 50

    if interest_match(location.category, profile.interests):
        score += 30

    day_categories = {a.category for a in day.activities if a.category}
    if location.category not in day_categories:
        score += 10

    if profile.has_children and location.kid_friendly:
        score += 10

    if location.category in GROUP_CATEGORIES.get(profile.group_type, ()):
        score += 5

    if profile.mobility_required and location.wheelchair_accessible is not None:
        score += 10 if location.wheelchair_accessible else -30

    return max(0, min(100, score))


def rank_candidates(
    candidates: Sequence[Location],
    profile: TravelerProfile,
    day: TripDay,
) -> list[tuple[Location, int]]:
    """Rank candidates by score descending; ties keep input order."""
    scored = [(location, score_candidate(location, profile, day)) for location in candidates]
    scored.sort(key=lambda pair: -pair[1])
    return scored


def removal_order(activities: Sequence[TripActivity]) -> list[int]:
    """Indices of activities ordered by removal priority.

    Lowest affinity goes first; among equals, the later activity goes first.
    The best meal-tagged activity, if any, is never listed.
    """
    protected = protected_meal_index(activities)
    indices = [i for i in range(len(activities)) if i != protected]
    indices.sort(key=lambda i: (activity_affinity(activities[i]), -i))
    return indices


def protected_meal_index(activities: Sequence[TripActivity]) -> int | None:
    """Index of the highest-affinity meal activity (earliest on ties)."""
    best: int | None = None
    for i, activity in enumerate(activities):
        if activity.meal_type is None:
            continue
        if best is None or activity_affinity(activity) > activity_affinity(activities[best]):
            best = i
    return best
