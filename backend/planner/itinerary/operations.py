"""Pure activity operations on an itinerary's days.

Every function returns a new itinerary of the same concrete type (a ``Trip``
stays a ``Trip``). Only the targeted day is rebuilt; every other day is the
same object as in the input, so callers can detect untouched days with ``is``.
When nothing changes (unknown day or activity id), the input itself is
returned.
"""

from collections.abc import Callable, Sequence
from typing import TypeVar

from backend.planner.models.trip import Itinerary, TripActivity, TripDay
from backend.planner.utils.logging import planning_logger

ItineraryT = TypeVar("ItineraryT", bound=Itinerary)


def _find_day_index(itinerary: Itinerary, day_id: str) -> int:
    for index, day in enumerate(itinerary.days):
        if day.id == day_id:
            return index
    return -1


def _replace_day(itinerary: ItineraryT, index: int, day: TripDay) -> ItineraryT:
    """Copy the day list, swapping only the entry at ``index``."""
    days = list(itinerary.days)
    days[index] = day
    return itinerary.model_copy(update={"days": days})


def _update_day_at(
    itinerary: ItineraryT,
    operation: str,
    index: int,
    update: Callable[[list[TripActivity]], list[TripActivity] | None],
) -> ItineraryT:
    """Apply ``update`` to the activities of the day at ``index``.

    ``update`` returns the new activity list, or None when nothing changed.
    """
    day = itinerary.days[index]
    activities = update(day.activities)
    if activities is None:
        planning_logger.log_edit(operation, day.id, "unchanged")
        return itinerary

    planning_logger.log_edit(operation, day.id, "applied", activity_count=len(activities))
    return _replace_day(itinerary, index, day.model_copy(update={"activities": activities}))


def _update_day(
    itinerary: ItineraryT,
    operation: str,
    day_id: str,
    update: Callable[[list[TripActivity]], list[TripActivity] | None],
) -> ItineraryT:
    """Apply ``update`` to the first day with ``day_id``."""
    index = _find_day_index(itinerary, day_id)
    if index < 0:
        planning_logger.log_edit(operation, day_id, "day_not_found")
        return itinerary
    return _update_day_at(itinerary, operation, index, update)


def _synthesize_days(itinerary: ItineraryT, day_index: int) -> ItineraryT:
    """Pad the itinerary with empty days so that ``day_index`` exists.

    New days are named ``day-<n>``, with a numeric suffix when that id is taken.
    """
    if day_index < len(itinerary.days):
        return itinerary
    days = list(itinerary.days)
    taken = {day.id for day in days}
    for n in range(len(days), day_index + 1):
        day_id = f"day-{n + 1}"
        suffix = 2
        while day_id in taken:
            day_id = f"day-{n + 1}-{suffix}"
            suffix += 1
        taken.add(day_id)
        days.append(TripDay(id=day_id))
    return itinerary.model_copy(update={"days": days})


def add_activity(
    itinerary: ItineraryT,
    day: str | int,
    activity: TripActivity,
    position: int | None = None,
) -> ItineraryT:
    """Insert an activity into a day.

    Args:
        itinerary: Source itinerary (not mutated)
        day: Day id, or a zero-based day index; an index past the end
            synthesizes empty days up to it
        activity: Activity to insert
        position: Insert position, clamped to [0, len]; appends when None

    Returns:
        New itinerary with the activity inserted
    """

    def insert(activities: list[TripActivity]) -> list[TripActivity]:
        if position is None:
            return [*activities, activity]
        at = max(0, min(position, len(activities)))
        return [*activities[:at], activity, *activities[at:]]

    if isinstance(day, int):
        if day < 0:
            planning_logger.log_edit("add_activity", day, "day_not_found")
            return itinerary
        return _update_day_at(_synthesize_days(itinerary, day), "add_activity", day, insert)

    return _update_day(itinerary, "add_activity", day, insert)


def replace_activity(
    itinerary: ItineraryT,
    day_id: str,
    activity_id: str,
    new_activity: TripActivity,
) -> ItineraryT:
    """Replace the activity with ``activity_id``; no-op if it is absent."""

    def replace(activities: list[TripActivity]) -> list[TripActivity] | None:
        if not any(a.id == activity_id for a in activities):
            return None
        return [new_activity if a.id == activity_id else a for a in activities]

    return _update_day(itinerary, "replace_activity", day_id, replace)


def delete_activity(itinerary: ItineraryT, day_id: str, activity_id: str) -> ItineraryT:
    """Remove the activity with ``activity_id``; no-op if it is absent."""

    def delete(activities: list[TripActivity]) -> list[TripActivity] | None:
        remaining = [a for a in activities if a.id != activity_id]
        if len(remaining) == len(activities):
            return None
        return remaining

    return _update_day(itinerary, "delete_activity", day_id, delete)


def reorder_activities(
    itinerary: ItineraryT,
    day_id: str,
    ordered_ids: Sequence[str],
) -> ItineraryT:
    """Rebuild a day's activities in the order of ``ordered_ids``.

    Ids that are not in the day are skipped. Activities not listed are dropped.
    """

    def reorder(activities: list[TripActivity]) -> list[TripActivity] | None:
        by_id = {a.id: a for a in activities}
        reordered: list[TripActivity] = []
        seen: set[str] = set()
        for activity_id in ordered_ids:
            if activity_id in by_id and activity_id not in seen:
                reordered.append(by_id[activity_id])
                seen.add(activity_id)
        if len(reordered) == len(activities) and all(
            a is b for a, b in zip(reordered, activities, strict=True)
        ):
            return None
        return reordered

    return _update_day(itinerary, "reorder_activities", day_id, reorder)


def replace_day(itinerary: ItineraryT, day_index: int, day: TripDay) -> ItineraryT:
    """Splice a refined day back into the itinerary at ``day_index``."""
    if not 0 <= day_index < len(itinerary.days):
        raise ValueError(f"Day index {day_index} out of range")
    if itinerary.days[day_index] is day:
        return itinerary
    return _replace_day(itinerary, day_index, day)
