"""Summary statistics for the normalized near-Earth object collection."""

from __future__ import annotations

from typing import Sequence

from ..config import MOON_DISTANCE_KM, THOUSANDS_SEPARATOR
from ..models import AsteroidStats, FilterState, NearEarthObject, SummaryCounters
from ..utils import format_grouped_int


def aggregate(
    objects: Sequence[NearEarthObject], *, moon_distance_km: float = MOON_DISTANCE_KM
) -> AsteroidStats:
    """Count hazards, find the top speed and the closest approach in moon distances."""
    total = len(objects)
    hazardous = sum(1 for item in objects if item.is_hazardous)
    max_velocity = max((item.relative_velocity_kmh for item in objects), default=0.0)
    closest = None
    if objects:
        nearest = min(item.miss_distance_km for item in objects)
        closest = round(nearest / moon_distance_km, 2)
    return AsteroidStats(
        total=total,
        hazardous_count=hazardous,
        safe_count=total - hazardous,
        max_velocity=max_velocity,
        closest_in_moon_distances=closest,
    )


def format_summary(
    stats: AsteroidStats, *, separator: str = THOUSANDS_SEPARATOR
) -> SummaryCounters:
    """Render the counters shown in the summary region."""
    closest = stats.closest_in_moon_distances
    return SummaryCounters(
        total=str(stats.total),
        hazardous=str(stats.hazardous_count),
        safe=str(stats.safe_count),
        max_speed=format_grouped_int(stats.max_velocity, separator),
        closest_moons=f"{closest:.2f}" if closest is not None else "–",
        filter_counts={
            FilterState.ALL: stats.total,
            FilterState.DANGEROUS: stats.hazardous_count,
            FilterState.SAFE: stats.safe_count,
        },
    )


__all__ = ["aggregate", "format_summary"]
