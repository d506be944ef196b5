"""Tests for the region and city recommender."""

import pytest

from backend.planner.adapters.reference_data import get_region, region_for_city
from backend.planner.models.common import Coordinates, EntryPointType, Vibe
from backend.planner.models.reference import RegionInfo
from backend.planner.models.trip_builder import EntryPoint
from backend.planner.recommendation.regions import (
    auto_select_cities,
    auto_select_regions,
    calculate_proximity_score,
    calculate_vibe_match,
    regions_to_select,
    score_regions,
)


@pytest.fixture
def kansai_airport() -> EntryPoint:
    """Kansai International Airport."""
    return EntryPoint(
        type=EntryPointType.airport,
        id="kix",
        name="Kansai International Airport",
        coordinates=Coordinates(lat=34.4347, lng=135.244),
        region_id="kansai",
    )


@pytest.fixture
def narita_airport() -> EntryPoint:
    """Narita International Airport."""
    return EntryPoint(
        type=EntryPointType.airport,
        id="nrt",
        name="Narita International Airport",
        coordinates=Coordinates(lat=35.7648, lng=140.3864),
        region_id="kanto",
    )


def region(region_id: str) -> RegionInfo:
    """Bundled region by id."""
    found = get_region(region_id)
    assert found is not None
    return found


# Component scores


def test_vibe_match_full_and_partial() -> None:
    """Test vibe match ratios and the multi-match bonus."""
    kansai = region("kansai")

    assert calculate_vibe_match(kansai, [Vibe.cultural_heritage, Vibe.foodie_paradise]) == 100
    assert calculate_vibe_match(kansai, [Vibe.cultural_heritage]) == 90
    assert calculate_vibe_match(kansai, [Vibe.cultural_heritage, Vibe.neon_nightlife]) == 45
    assert calculate_vibe_match(kansai, [Vibe.neon_nightlife]) == 0


def test_vibe_match_is_neutral_without_vibes() -> None:
    """Test that no vibes scores every region 50."""
    assert calculate_vibe_match(region("okinawa"), []) == 50


def test_proximity_is_high_for_nearby_entry_point(narita_airport: EntryPoint) -> None:
    """Test proximity near and far from the entry point."""
    assert calculate_proximity_score(region("kanto"), narita_airport) > 90
    assert calculate_proximity_score(region("okinawa"), narita_airport) < 30
    assert calculate_proximity_score(region("kanto"), None) == 50


# Ranking


def test_score_regions_without_input_keeps_catalog_order() -> None:
    """Test that equal scores keep catalog order and the first three are recommended."""
    scored = score_regions([])

    assert [s.total_score for s in scored] == [50] * len(scored)
    assert [s.region.id for s in scored[:3]] == ["kansai", "kanto", "chubu"]
    assert [s.is_recommended for s in scored] == [True] * 3 + [False] * (len(scored) - 3)


def test_score_regions_bounds_and_order(narita_airport: EntryPoint) -> None:
    """Test that scores stay within 0-100 and totals descend."""
    scored = score_regions([Vibe.nature_adventure, Vibe.hidden_gems], narita_airport)

    for score in scored:
        assert 0 <= score.match_score <= 100
        assert 0 <= score.proximity_score <= 100
        assert 0 <= score.total_score <= 100
    totals = [s.total_score for s in scored[1:]]
    assert totals == sorted(totals, reverse=True)


def test_entry_point_region_is_moved_first(kansai_airport: EntryPoint) -> None:
    """Test that the entry region leads even with no vibe match."""
    scored = score_regions([Vibe.nature_adventure], kansai_airport)

    assert scored[0].region.id == "kansai"
    assert scored[0].is_entry_point_region is True
    assert scored[0].is_recommended is True
    assert scored[0].match_score == 0
    assert sum(s.is_entry_point_region for s in scored) == 1


def test_score_regions_accepts_custom_catalog() -> None:
    """Test scoring against an explicit region list."""
    catalog = [
        RegionInfo(id="a", name="A", coordinates=Coordinates(lat=35.0, lng=135.0)),
        RegionInfo(
            id="b",
            name="B",
            best_for=[Vibe.foodie_paradise],
            coordinates=Coordinates(lat=35.0, lng=139.0),
        ),
    ]

    scored = score_regions([Vibe.foodie_paradise], regions=catalog)

    assert [s.region.id for s in scored] == ["b", "a"]
    assert all(s.is_recommended for s in scored)


# Auto-selection


@pytest.mark.parametrize(
    "duration,expected",
    [(None, 1), (3, 1), (5, 1), (6, 2), (9, 2), (10, 3), (21, 3)],
)
def test_regions_to_select_by_duration(duration: int | None, expected: int) -> None:
    """Test the region count thresholds."""
    assert regions_to_select(duration) == expected


def test_auto_select_regions_starts_with_entry_region(kansai_airport: EntryPoint) -> None:
    """Test that a week-long trip selects the entry region plus one more."""
    selected = auto_select_regions([Vibe.neon_nightlife], kansai_airport, duration=7)

    assert selected == ["kansai", "kanto"]


def test_auto_select_cities_spans_two_regions(kansai_airport: EntryPoint) -> None:
    """Test that selected cities come from the entry region and the best other one."""
    cities = auto_select_cities([Vibe.neon_nightlife], kansai_airport)

    assert cities == ["kyoto", "osaka", "nara", "kobe", "tokyo", "yokohama"]


def test_auto_select_cities_without_entry_point() -> None:
    """Test that the two best-scoring regions supply the cities."""
    cities = auto_select_cities([Vibe.cultural_heritage, Vibe.foodie_paradise])

    regions = {r.id for r in (region_for_city(c) for c in cities) if r is not None}
    assert regions == {"kansai", "kanto"}


def test_auto_select_cities_ignores_unknown_entry_region() -> None:
    """Test that an entry region outside the catalog is not forced in."""
    entry = EntryPoint(
        type=EntryPointType.city,
        id="elsewhere",
        name="Elsewhere",
        coordinates=Coordinates(lat=35.0, lng=135.0),
        region_id="atlantis",
    )

    cities = auto_select_cities([], entry)

    regions = {r.id for r in (region_for_city(c) for c in cities) if r is not None}
    assert len(regions) == 2
    assert "atlantis" not in regions
