"""Shared pytest fixtures for all test suites."""

from datetime import date

import pytest

from backend.planner.models.common import Interest, TimeSlot, TripStyle
from backend.planner.models.trip import (
    LocationSnapshot,
    TravelerProfile,
    Trip,
    TripActivity,
    TripDay,
)


@pytest.fixture
def tokyo_day() -> TripDay:
    """Three-stop Tokyo day: temple, lunch, museum."""
    return TripDay(
        id="day-1",
        date=date(2026, 4, 2),
        city_id="tokyo",
        activities=[
            TripActivity(
                id="act-1",
                location_id="tokyo-sensoji",
                location=LocationSnapshot(name="Senso-ji", category="temple", kid_friendly=True),
                time_slot=TimeSlot.morning,
                duration=90,
            ),
            TripActivity(
                id="act-2",
                location_id="tokyo-tsukiji-outer-market",
                location=LocationSnapshot(name="Tsukiji Outer Market", category="market"),
                time_slot=TimeSlot.afternoon,
                duration=60,
            ),
            TripActivity(
                id="act-3",
                location_id="tokyo-national-museum",
                location=LocationSnapshot(name="Tokyo National Museum", category="museum"),
                time_slot=TimeSlot.afternoon,
                duration=120,
            ),
        ],
    )


@pytest.fixture
def sample_trip(tokyo_day: TripDay) -> Trip:
    """Two-day trip with a populated first day and an empty second day."""
    return Trip(
        id="trip-1",
        name="Spring in Japan",
        days=[
            tokyo_day,
            TripDay(id="day-2", date=date(2026, 4, 3), city_id="kyoto"),
        ],
        traveler_profile=TravelerProfile(
            pace=TripStyle.balanced,
            interests=[Interest.food, Interest.culture],
        ),
    )
