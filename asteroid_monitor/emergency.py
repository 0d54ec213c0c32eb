"""Inline emergency dataset used when both the live feed and snapshot fail.

Entries follow the NeoWs feed shape so they pass through the same normalizer
as live data.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List

EMERGENCY_DATE = "2024-10-22"


def _entry(
    name: str,
    *,
    hazardous: bool,
    diameter_m: float,
    distance_km: float,
    velocity_kmh: float,
    approach_date: str,
) -> Dict[str, Any]:
    return {
        "name": name,
        "estimated_diameter": {"meters": {"estimated_diameter_max": diameter_m}},
        "is_potentially_hazardous_asteroid": hazardous,
        "close_approach_data": [
            {
                "close_approach_date": approach_date,
                "miss_distance": {"kilometers": str(distance_km)},
                "relative_velocity": {"kilometers_per_hour": str(velocity_kmh)},
            }
        ],
    }


EMERGENCY_OBJECTS: List[Dict[str, Any]] = [
    _entry(
        "2024 XY1",
        hazardous=True,
        diameter_m=250,
        distance_km=2_500_000,
        velocity_kmh=45_000,
        approach_date="2024-10-22",
    ),
    _entry(
        "2024 AB2",
        hazardous=False,
        diameter_m=150,
        distance_km=5_500_000,
        velocity_kmh=32_000,
        approach_date="2024-10-23",
    ),
    _entry(
        "2024 CD3",
        hazardous=True,
        diameter_m=180,
        distance_km=3_800_000,
        velocity_kmh=28_000,
        approach_date="2024-10-24",
    ),
    _entry(
        "2024 EF4",
        hazardous=False,
        diameter_m=90,
        distance_km=7_200_000,
        velocity_kmh=35_000,
        approach_date="2024-10-25",
    ),
]


def build_emergency_payload() -> Dict[str, List[Dict[str, Any]]]:
    """Return a fresh copy of the emergency dataset under its synthetic date."""

    return {EMERGENCY_DATE: copy.deepcopy(EMERGENCY_OBJECTS)}


__all__ = ["EMERGENCY_DATE", "EMERGENCY_OBJECTS", "build_emergency_payload"]
