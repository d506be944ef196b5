"""Region and city recommender.

Scores every catalog region against the traveler's vibes and the distance
from their entry point, then derives the regions and cities to pre-select for
the trip builder.
"""

from collections.abc import Sequence

from backend.planner.adapters.reference_data import load_regions
from backend.planner.config import get_settings
from backend.planner.models.common import Vibe
from backend.planner.models.recommendation import RegionScore
from backend.planner.models.reference import RegionInfo
from backend.planner.models.trip_builder import EntryPoint
from backend.planner.utils.geo import haversine_km


def calculate_vibe_match(region: RegionInfo, vibes: Sequence[Vibe]) -> int:
    """Score 0-100 for how many of the selected vibes the region is best for.

    Regions matching more than one vibe get a +10 specialization bonus.
    """
    if not vibes:
        return get_settings().neutral_score

    matching = [vibe for vibe in vibes if vibe in region.best_for]
    ratio = len(matching) / len(vibes)
    bonus = 10 if len(matching) > 1 else 0
    return round(min(100, ratio * 90 + bonus))


def calculate_proximity_score(region: RegionInfo, entry_point: EntryPoint | None) -> int:
    """Score 0-100 where the entry point's closest regions score highest."""
    settings = get_settings()
    if entry_point is None:
        return settings.neutral_score

    distance = haversine_km(entry_point.coordinates, region.coordinates)
    ceiling = settings.proximity_ceiling_km
    return round((1 - min(distance, ceiling) / ceiling) * 100)


def score_regions(
    vibes: Sequence[Vibe],
    entry_point: EntryPoint | None = None,
    regions: Sequence[RegionInfo] | None = None,
) -> list[RegionScore]:
    """Score and rank regions for a trip.

    Args:
        vibes: Selected vibes (may be empty)
        entry_point: Optional arrival location
        regions: Region catalog override (defaults to the bundled catalog)

    Returns:
        Regions sorted by total score descending (ties keep catalog order), with
        the entry point's region moved to the front and the first entries
        flagged as recommended.
    """
    settings = get_settings()
    catalog = load_regions() if regions is None else regions
    entry_region_id = entry_point.region_id if entry_point else None

    scored: list[RegionScore] = []
    for region in catalog:
        match_score = calculate_vibe_match(region, vibes)
        proximity_score = calculate_proximity_score(region, entry_point)
        total_score = round(
            match_score * settings.vibe_weight + proximity_score * settings.proximity_weight
        )
        scored.append(
            RegionScore(
                region=region,
                match_score=match_score,
                proximity_score=proximity_score,
                total_score=total_score,
                is_entry_point_region=region.id == entry_region_id,
            )
        )

    # sort() is stable, so equal totals keep catalog order
    scored.sort(key=lambda s: -s.total_score)

    if entry_region_id:
        index = next((i for i, s in enumerate(scored) if s.region.id == entry_region_id), -1)
        if index > 0:
            scored.insert(0, scored.pop(index))

    top = settings.recommended_region_count
    return [
        s.model_copy(update={"is_recommended": True}) if i < top else s
        for i, s in enumerate(scored)
    ]


def regions_to_select(duration: int | None) -> int:
    """How many regions fit a trip of the given length."""
    if not duration or duration <= 5:
        return 1
    if duration <= 9:
        return 2
    return 3


def auto_select_regions(
    vibes: Sequence[Vibe],
    entry_point: EntryPoint | None = None,
    duration: int | None = None,
    regions: Sequence[RegionInfo] | None = None,
) -> list[str]:
    """Region ids to pre-select: 1 for up to 5 days, 2 up to 9, else 3."""
    scored = score_regions(vibes, entry_point, regions)
    return [s.region.id for s in scored[: regions_to_select(duration)]]


def auto_select_cities(
    vibes: Sequence[Vibe],
    entry_point: EntryPoint | None = None,
    regions: Sequence[RegionInfo] | None = None,
) -> list[str]:
    """City ids to pre-select, drawn from exactly two distinct regions.

    The entry point's region (when it is in the catalog) is always one of the
    two; the other is the best-scoring region not already chosen. Cities are
    returned in catalog order.
    """
    catalog = load_regions() if regions is None else regions
    scored = score_regions(vibes, entry_point, catalog)

    chosen: list[str] = []
    entry_region_id = entry_point.region_id if entry_point else None
    if entry_region_id and any(r.id == entry_region_id for r in catalog):
        chosen.append(entry_region_id)

    for score in scored:
        if len(chosen) >= 2:
            break
        if score.region.id not in chosen:
            chosen.append(score.region.id)

    return [city.id for region in catalog if region.id in chosen for city in region.cities]
