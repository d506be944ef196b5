"""Tests for planning warning detection."""

from datetime import date

import pytest
from pydantic import ValidationError

from backend.planner.models.reference import CalendarWindow
from backend.planner.models.trip_builder import TripBuilderData, TripDates
from backend.planner.models.warnings import (
    PlanningWarning,
    WarningSeverity,
    WarningType,
)
from backend.planner.verification.warnings import (
    detect_distance_warnings,
    detect_pacing_warnings,
    detect_planning_warnings,
    get_warnings_summary,
    trip_overlaps_window,
)


def make_data(
    start: date | None = None,
    end: date | None = None,
    **fields: object,
) -> TripBuilderData:
    """Helper to build normalized trip builder data."""
    return TripBuilderData.model_validate({"dates": TripDates(start=start, end=end), **fields})


def of_type(warnings: list[PlanningWarning], warning_type: WarningType) -> list[PlanningWarning]:
    """Filter warnings by type."""
    return [w for w in warnings if w.type == warning_type]


# Pacing


def test_three_cities_in_three_days_is_ambitious() -> None:
    """Test the short-trip pacing caution."""
    warnings = detect_planning_warnings(make_data(cities=["tokyo", "kyoto", "osaka"], duration=3))

    pacing = of_type(warnings, WarningType.PACING)
    assert len(pacing) == 1
    assert pacing[0].severity == WarningSeverity.CAUTION
    assert pacing[0].title == "Ambitious Itinerary"


def test_five_cities_in_five_days_is_fast_paced() -> None:
    """Test the moderate-trip pacing warning."""
    cities = ["tokyo", "kyoto", "osaka", "nara", "kobe"]

    pacing = detect_pacing_warnings(make_data(cities=cities, duration=5))

    assert [w.id for w in pacing] == ["pacing-moderate-trip"]
    assert pacing[0].severity == WarningSeverity.WARNING


def test_high_city_ratio_is_informational() -> None:
    """Test the general pacing info above 0.8 cities per day."""
    cities = ["tokyo", "kyoto", "osaka", "nara", "kobe"]

    pacing = detect_pacing_warnings(make_data(cities=cities, duration=6))

    assert [w.id for w in pacing] == ["pacing-general"]
    assert pacing[0].severity == WarningSeverity.INFO


def test_relaxed_pacing_has_no_warning() -> None:
    """Test that two cities in a week are fine."""
    assert detect_pacing_warnings(make_data(cities=["tokyo", "kyoto"], duration=7)) == []


def test_pacing_requires_cities_and_length() -> None:
    """Test that missing inputs produce no pacing warning."""
    assert detect_pacing_warnings(make_data(duration=3)) == []
    assert detect_pacing_warnings(make_data(cities=["tokyo", "kyoto", "osaka"])) == []


def test_pacing_derives_length_from_dates() -> None:
    """Test that dates stand in for a missing duration."""
    data = make_data(
        start=date(2026, 3, 1), end=date(2026, 3, 3), cities=["tokyo", "kyoto", "osaka"]
    )

    assert [w.id for w in detect_pacing_warnings(data)] == ["pacing-short-trip"]


# Holidays


def test_new_year_detected_across_year_boundary() -> None:
    """Test the year-wrapping New Year window."""
    warnings = detect_planning_warnings(make_data(start=date(2026, 12, 30), end=date(2027, 1, 3)))

    holidays = of_type(warnings, WarningType.HOLIDAY)
    assert [w.id for w in holidays] == ["holiday-new-year"]
    assert "New Year" in holidays[0].title
    assert holidays[0].severity == WarningSeverity.WARNING


def test_new_year_tail_detected_in_january() -> None:
    """Test a trip starting inside the January part of the window."""
    warnings = detect_planning_warnings(make_data(start=date(2027, 1, 2), end=date(2027, 1, 10)))

    assert [w.id for w in of_type(warnings, WarningType.HOLIDAY)] == ["holiday-new-year"]


def test_golden_week_overlap_is_inclusive() -> None:
    """Test that touching the first day of Golden Week counts."""
    warnings = detect_planning_warnings(make_data(start=date(2026, 4, 25), end=date(2026, 4, 29)))

    holidays = of_type(warnings, WarningType.HOLIDAY)
    assert [w.title for w in holidays] == ["Golden Week Travel Period"]


def test_quiet_dates_have_no_holiday() -> None:
    """Test a trip outside every holiday window."""
    warnings = detect_planning_warnings(make_data(start=date(2026, 6, 10), end=date(2026, 6, 15)))

    assert of_type(warnings, WarningType.HOLIDAY) == []


def test_holiday_requires_both_dates() -> None:
    """Test that a single date produces no calendar warnings."""
    assert detect_planning_warnings(make_data(start=date(2026, 12, 30))) == []


# Seasons


def test_rainy_season_is_informational() -> None:
    """Test the rainy season warning."""
    warnings = detect_planning_warnings(make_data(start=date(2026, 6, 10), end=date(2026, 6, 15)))

    rainy = of_type(warnings, WarningType.SEASONAL_RAINY)
    assert len(rainy) == 1
    assert rainy[0].severity == WarningSeverity.INFO
    assert rainy[0].title == "Rainy Season (Tsuyu)"


def test_long_summer_trip_flags_each_window_once() -> None:
    """Test a trip spanning several windows."""
    warnings = detect_planning_warnings(make_data(start=date(2026, 6, 1), end=date(2026, 9, 30)))

    ids = [w.id for w in warnings]
    assert ids.count("seasonal-rainy") == 1
    assert ids.count("seasonal-summer") == 1
    assert "holiday-obon" in ids
    assert "holiday-silver-week" in ids
    assert "seasonal-autumn" not in ids


def test_multi_year_trip_flags_winter_once() -> None:
    """Test that a window touched in two years yields one warning."""
    warnings = detect_planning_warnings(make_data(start=date(2025, 12, 20), end=date(2027, 1, 5)))

    assert [w.id for w in warnings].count("seasonal-winter") == 1


def test_wrapping_window_overlap() -> None:
    """Test year-wrap overlap on both sides of the boundary."""
    window = CalendarWindow(
        key="winter",
        name="Winter",
        start_month=12,
        start_day=15,
        end_month=2,
        end_day=28,
        message="",
    )

    assert trip_overlaps_window(window, date(2027, 2, 20), date(2027, 3, 5))
    assert trip_overlaps_window(window, date(2026, 12, 1), date(2026, 12, 15))
    assert not trip_overlaps_window(window, date(2026, 3, 1), date(2026, 12, 14))


# Distance


def test_hokkaido_and_okinawa_is_long_distance() -> None:
    """Test the known far region pair."""
    warnings = detect_planning_warnings(make_data(regions=["hokkaido", "okinawa"]))

    distance = of_type(warnings, WarningType.DISTANCE)
    assert len(distance) == 1
    assert distance[0].severity == WarningSeverity.WARNING
    assert distance[0].title == "Long Distance Between Regions"


def test_neighbouring_regions_have_no_distance_warning() -> None:
    """Test that Kansai and Kanto are close enough."""
    warnings = detect_planning_warnings(make_data(regions=["kansai", "kanto"]))

    assert of_type(warnings, WarningType.DISTANCE) == []


def test_far_pair_beyond_threshold_names_regions() -> None:
    """Test the generic distance warning for Kanto and Kyushu."""
    distance = detect_distance_warnings(make_data(regions=["kanto", "kyushu"]))

    assert [w.id for w in distance] == ["distance-far"]
    assert distance[0].title == "Significant Travel Distance"
    assert "Kanto" in distance[0].message
    assert "Kyushu" in distance[0].message


def test_known_far_pair_takes_precedence() -> None:
    """Test that only one distance warning is produced."""
    distance = detect_distance_warnings(make_data(regions=["kanto", "hokkaido", "kyushu"]))

    assert [w.id for w in distance] == ["distance-extreme"]


def test_unknown_regions_are_ignored() -> None:
    """Test that regions without centroids do not count."""
    assert detect_distance_warnings(make_data(regions=["kansai", "atlantis"])) == []


# Summary


def test_summary_of_empty_list() -> None:
    """Test that an empty list summarizes to zeros in a read-only summary."""
    summary = get_warnings_summary([])

    assert summary.total == 0
    assert summary.cautions == 0
    assert summary.warnings == 0
    assert summary.info == 0

    with pytest.raises(ValidationError):
        summary.total = 1  # type: ignore[misc]


@pytest.mark.parametrize(
    "start,end,regions,cities,duration",
    [
        (date(2026, 12, 30), date(2027, 1, 3), ["hokkaido", "okinawa"], ["sapporo", "naha"], 5),
        (date(2026, 4, 1), date(2026, 5, 10), ["kansai"], ["kyoto", "osaka", "nara"], 3),
        (None, None, ["kanto", "kyushu"], [], None),
    ],
)
def test_summary_counts_sum_to_total(
    start: date | None,
    end: date | None,
    regions: list[str],
    cities: list[str],
    duration: int | None,
) -> None:
    """Test that severity counts always add up."""
    warnings = detect_planning_warnings(
        make_data(start=start, end=end, regions=regions, cities=cities, duration=duration)
    )

    summary = get_warnings_summary(warnings)

    assert summary.total == len(warnings) > 0
    assert summary.cautions + summary.warnings + summary.info == summary.total
