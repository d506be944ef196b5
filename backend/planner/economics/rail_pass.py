"""Rail pass break-even calculator.

Compares the cheapest qualifying multi-day pass against the summed
point-to-point fares for an ordered city sequence.
"""

from collections.abc import Sequence
from itertools import pairwise

from backend.planner.adapters.reference_data import load_rail_fares, load_rail_passes
from backend.planner.models.economics import Journey, RailPassValue
from backend.planner.models.reference import RailFare, RailPassTier


def build_fare_table(fares: Sequence[RailFare]) -> dict[tuple[str, str], int]:
    """Index fares by (from, to) exactly as listed."""
    return {(f.from_city, f.to_city): f.fare for f in fares}


def lookup_fare(table: dict[tuple[str, str], int], from_city: str, to_city: str) -> int | None:
    """Fare for a leg in either direction, or None when unknown."""
    fare = table.get((from_city, to_city))
    if fare is None:
        fare = table.get((to_city, from_city))
    return fare


def build_journeys(cities: Sequence[str], table: dict[tuple[str, str], int]) -> list[Journey]:
    """Consecutive legs, skipping a city repeated back to back."""
    journeys: list[Journey] = []
    for from_city, to_city in pairwise(cities):
        if from_city == to_city:
            continue
        journeys.append(
            Journey(from_city=from_city, to_city=to_city, fare=lookup_fare(table, from_city, to_city))
        )
    return journeys


def cheapest_pass(duration: int, passes: Sequence[RailPassTier]) -> RailPassTier | None:
    """Cheapest tier that covers the whole trip."""
    qualifying = [p for p in passes if p.days >= duration]
    if not qualifying:
        return None
    return min(qualifying, key=lambda p: p.price)


def calculate_rail_pass_value(
    duration: int,
    cities: Sequence[str],
    fares: Sequence[RailFare] | None = None,
    passes: Sequence[RailPassTier] | None = None,
) -> RailPassValue:
    """Decide whether a rail pass beats buying individual tickets.

    Args:
        duration: Trip length in days
        cities: Ordered city ids as visited
        fares: Fare table override (defaults to the bundled table)
        passes: Pass tiers override (defaults to the bundled tiers)

    Returns:
        RailPassValue with the per-leg journeys; legs with no known fare are
        listed with ``fare=None`` and left out of ``individual_total``
    """
    table = build_fare_table(load_rail_fares() if fares is None else fares)
    journeys = build_journeys(cities, table)
    individual_total = sum(j.fare for j in journeys if j.fare is not None)

    tier = cheapest_pass(duration, load_rail_passes() if passes is None else passes)
    if tier is None:
        return RailPassValue(
            recommendation="skip",
            individual_total=individual_total,
            pass_type=None,
            savings=0,
            journeys=journeys,
        )

    savings = individual_total - tier.price
    return RailPassValue(
        recommendation="save" if savings > 0 else "skip",
        individual_total=individual_total,
        pass_type=tier,
        savings=savings,
        journeys=journeys,
    )
