"""Planning warning detectors: pacing, holidays, seasons and travel distance.

Warnings are advisory. Each detector returns a list (empty when nothing is
worth flagging) and never raises on incomplete builder data.
"""

import calendar
from collections.abc import Sequence
from datetime import date
from itertools import combinations

from backend.planner.adapters.reference_data import (
    get_region,
    load_far_region_pairs,
    load_holiday_windows,
    load_seasonal_windows,
)
from backend.planner.config import get_settings
from backend.planner.models.reference import CalendarWindow, RegionInfo
from backend.planner.models.trip_builder import TripBuilderData
from backend.planner.models.warnings import (
    PlanningWarning,
    WarningSeverity,
    WarningsSummary,
    WarningType,
)
from backend.planner.utils.geo import haversine_km


def _window_date(year: int, month: int, day: int) -> date:
    """Build a date, clamping the day to the month's length."""
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))


def window_occurrences(window: CalendarWindow, start: date, end: date) -> list[tuple[date, date]]:
    """Concrete date ranges of an annual window that could touch [start, end].

    A window that wraps over the new year is anchored on the year it starts, so
    the year before the trip is included to catch its tail end.
    """
    first_year = start.year - 1 if window.wraps_year else start.year
    occurrences: list[tuple[date, date]] = []
    for year in range(first_year, end.year + 1):
        end_year = year + 1 if window.wraps_year else year
        occurrences.append(
            (
                _window_date(year, window.start_month, window.start_day),
                _window_date(end_year, window.end_month, window.end_day),
            )
        )
    return occurrences


def trip_overlaps_window(window: CalendarWindow, start: date, end: date) -> bool:
    """Inclusive overlap between the trip and any occurrence of the window."""
    return any(
        window_start <= end and window_end >= start
        for window_start, window_end in window_occurrences(window, start, end)
    )


def detect_pacing_warnings(data: TripBuilderData) -> list[PlanningWarning]:
    """Flag trips with too many cities for their length.

    Args:
        data: Normalized trip builder data

    Returns:
        At most one pacing warning
    """
    city_count = len(data.cities)
    days = data.trip_length
    if city_count == 0 or not days:
        return []

    # Case 1: Very short trip with several cities - CAUTION
    if days <= 3 and city_count >= 3:
        return [
            PlanningWarning(
                id="pacing-short-trip",
                type=WarningType.PACING,
                severity=WarningSeverity.CAUTION,
                title="Ambitious Itinerary",
                message=(
                    f"{city_count} cities in {days} days is quite ambitious. Consider focusing "
                    "on 1-2 cities to have time to explore each area properly."
                ),
            )
        ]

    # Case 2: Short trip with many cities - WARNING
    if days <= 5 and city_count >= 5:
        return [
            PlanningWarning(
                id="pacing-moderate-trip",
                type=WarningType.PACING,
                severity=WarningSeverity.WARNING,
                title="Fast-Paced Trip",
                message=(
                    f"{city_count} cities in {days} days means lots of travel. Consider "
                    "reducing to 3-4 cities to spend more time in each place."
                ),
            )
        ]

    # Case 3: Nearly a new city every day - INFO
    if city_count / days > 0.8:
        return [
            PlanningWarning(
                id="pacing-general",
                type=WarningType.PACING,
                severity=WarningSeverity.INFO,
                title="Active Itinerary",
                message=(
                    f"With {city_count} cities planned you'll be moving frequently. Fine if you "
                    "enjoy a fast pace, but fewer places allow deeper exploration."
                ),
            )
        ]

    return []


def detect_holiday_warnings(data: TripBuilderData) -> list[PlanningWarning]:
    """One warning per Japanese holiday period the trip overlaps."""
    start, end = data.dates.start, data.dates.end
    if start is None or end is None:
        return []

    return [
        PlanningWarning(
            id=f"holiday-{window.key}",
            type=WarningType.HOLIDAY,
            severity=WarningSeverity.WARNING,
            title=f"{window.name} Travel Period",
            message=window.message,
        )
        for window in load_holiday_windows()
        if trip_overlaps_window(window, start, end)
    ]


def detect_seasonal_warnings(data: TripBuilderData) -> list[PlanningWarning]:
    """One informational warning per season the trip overlaps."""
    start, end = data.dates.start, data.dates.end
    if start is None or end is None:
        return []

    return [
        PlanningWarning(
            id=f"seasonal-{window.key}",
            type=WarningType(window.warning_type or WarningType.WEATHER.value),
            severity=WarningSeverity.INFO,
            title=window.name,
            message=window.message,
        )
        for window in load_seasonal_windows()
        if trip_overlaps_window(window, start, end)
    ]


def _known_regions(region_ids: Sequence[str]) -> list[RegionInfo]:
    regions: list[RegionInfo] = []
    for region_id in region_ids:
        region = get_region(region_id)
        if region is not None:
            regions.append(region)
    return regions


def detect_distance_warnings(data: TripBuilderData) -> list[PlanningWarning]:
    """Flag region selections that are far apart.

    Every unordered pair of known regions is measured. A known far pair
    (Hokkaido with Kyushu or Okinawa) takes precedence over the generic
    threshold on the farthest pair.
    """
    regions = _known_regions(data.regions)
    if len(regions) < 2:
        return []

    far_pairs = load_far_region_pairs()
    max_distance = 0.0
    farthest: tuple[RegionInfo, RegionInfo] | None = None
    has_far_pair = False

    for region_a, region_b in combinations(regions, 2):
        if frozenset((region_a.id, region_b.id)) in far_pairs:
            has_far_pair = True
        distance = haversine_km(region_a.coordinates, region_b.coordinates)
        if distance > max_distance:
            max_distance = distance
            farthest = (region_a, region_b)

    if has_far_pair:
        return [
            PlanningWarning(
                id="distance-extreme",
                type=WarningType.DISTANCE,
                severity=WarningSeverity.WARNING,
                title="Long Distance Between Regions",
                message=(
                    "Hokkaido and southern Japan (Kyushu/Okinawa) are over 2,000km apart. "
                    "Consider domestic flights or focusing on one area to make the most of your time."
                ),
            )
        ]

    if farthest is not None and max_distance > get_settings().far_region_distance_km:
        region_a, region_b = farthest
        return [
            PlanningWarning(
                id="distance-far",
                type=WarningType.DISTANCE,
                severity=WarningSeverity.WARNING,
                title="Significant Travel Distance",
                message=(
                    f"{region_a.name} and {region_b.name} are about {round(max_distance)}km apart. "
                    "Plan for travel time between these regions, or consider a domestic flight."
                ),
            )
        ]

    return []


def detect_planning_warnings(data: TripBuilderData) -> list[PlanningWarning]:
    """Run every detector over the builder data.

    Args:
        data: Normalized trip builder data

    Returns:
        Pacing, distance, holiday and seasonal warnings, in that order
    """
    return [
        *detect_pacing_warnings(data),
        *detect_distance_warnings(data),
        *detect_holiday_warnings(data),
        *detect_seasonal_warnings(data),
    ]


def get_warnings_summary(warnings: Sequence[PlanningWarning]) -> WarningsSummary:
    """Count warnings per severity."""
    return WarningsSummary(
        total=len(warnings),
        cautions=sum(1 for w in warnings if w.severity == WarningSeverity.CAUTION),
        warnings=sum(1 for w in warnings if w.severity == WarningSeverity.WARNING),
        info=sum(1 for w in warnings if w.severity == WarningSeverity.INFO),
    )
