"""Bundled reference data loaders: regions, fares, rail passes, calendars, locations.

Each table is read from JSON once per process and cached. Callers must treat
the returned sequences as read-only.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from backend.planner.config import get_settings
from backend.planner.models.reference import (
    CalendarWindow,
    Location,
    RailFare,
    RailPassTier,
    RegionInfo,
)

logger = logging.getLogger(__name__)


def _load_json(filename: str) -> Any:
    """Load a reference table from the configured reference directory."""
    path: Path = get_settings().reference_dir / filename
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    logger.debug("Loaded reference table", extra={"structured": {"file": filename}})
    return data


@lru_cache
def load_regions() -> tuple[RegionInfo, ...]:
    """Region catalog in canonical order."""
    return tuple(RegionInfo.model_validate(r) for r in _load_json("regions.json"))


@lru_cache
def load_far_region_pairs() -> frozenset[frozenset[str]]:
    """Region pairs always considered too far apart for one trip."""
    return frozenset(frozenset(pair) for pair in _load_json("far_region_pairs.json"))


@lru_cache
def load_rail_fares() -> tuple[RailFare, ...]:
    """Point-to-point fares between cities."""
    return tuple(RailFare.model_validate(f) for f in _load_json("rail.json")["fares"])


@lru_cache
def load_rail_passes() -> tuple[RailPassTier, ...]:
    """Rail pass tiers."""
    return tuple(RailPassTier.model_validate(p) for p in _load_json("rail.json")["passes"])


@lru_cache
def load_holiday_windows() -> tuple[CalendarWindow, ...]:
    """Annual Japanese holiday periods."""
    return tuple(CalendarWindow.model_validate(w) for w in _load_json("calendar.json")["holidays"])


@lru_cache
def load_seasonal_windows() -> tuple[CalendarWindow, ...]:
    """Annual seasonal periods."""
    return tuple(CalendarWindow.model_validate(w) for w in _load_json("calendar.json")["seasons"])


@lru_cache
def load_locations() -> tuple[Location, ...]:
    """Default candidate locations for day refinement."""
    return tuple(Location.model_validate(loc) for loc in _load_json("locations.json"))


def get_region(region_id: str) -> RegionInfo | None:
    """Look up a region by id."""
    for region in load_regions():
        if region.id == region_id:
            return region
    return None


def region_for_city(city_id: str) -> RegionInfo | None:
    """Find the region a city belongs to."""
    for region in load_regions():
        if any(city.id == city_id for city in region.cities):
            return region
    return None


def clear_reference_cache() -> None:
    """Drop cached tables (tests that point reference_dir elsewhere)."""
    for loader in (
        load_regions,
        load_far_region_pairs,
        load_rail_fares,
        load_rail_passes,
        load_holiday_windows,
        load_seasonal_windows,
        load_locations,
    ):
        loader.cache_clear()
