"""Flatten NeoWs feed payloads into uniform near-Earth object records.

Updates: v0.1 - 2026-10-12 - Introduced record normalizer for grouped feed payloads.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping

from .errors import FieldParseFailure
from .models import NearEarthObject, RawPayload
from .utils import parse_finite_float

logger = logging.getLogger(__name__)


def _nested(entry: Mapping[str, Any], *path: str) -> Any:
    current: Any = entry
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def _required_float(entry: Mapping[str, Any], label: str, *path: str) -> float:
    value = parse_finite_float(_nested(entry, *path))
    if value is None:
        raise FieldParseFailure(f"{label} missing or not numeric")
    return value


def _hazard_flag(value: Any) -> bool:
    """Read the hazard flag; only a real ``True`` or the string "true" counts."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def normalize_entry(raw: Any) -> NearEarthObject:
    """Convert one vendor entry, using its first close-approach record.

    Raises:
        FieldParseFailure: when the entry lacks approach data, a name, or a
            parsable diameter, miss distance or velocity.
    """
    if not isinstance(raw, Mapping):
        raise FieldParseFailure("entry is not an object")

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise FieldParseFailure("entry has no name")

    approaches = raw.get("close_approach_data")
    if not isinstance(approaches, list) or not approaches:
        raise FieldParseFailure(f"{name}: no close approach data")
    approach = approaches[0]
    if not isinstance(approach, Mapping):
        raise FieldParseFailure(f"{name}: close approach entry is not an object")

    diameter = _required_float(
        raw, f"{name}: diameter", "estimated_diameter", "meters", "estimated_diameter_max"
    )
    distance = _required_float(approach, f"{name}: miss distance", "miss_distance", "kilometers")
    velocity = _required_float(
        approach, f"{name}: velocity", "relative_velocity", "kilometers_per_hour"
    )
    approach_date = approach.get("close_approach_date")

    return NearEarthObject(
        name=name.strip(),
        estimated_diameter_m=diameter,
        miss_distance_km=distance,
        relative_velocity_kmh=velocity,
        is_hazardous=_hazard_flag(raw.get("is_potentially_hazardous_asteroid")),
        close_approach_date=approach_date.strip() if isinstance(approach_date, str) else "",
    )


def normalize_feed(payload: RawPayload) -> List[NearEarthObject]:
    """Flatten all dates in payload order, dropping unusable entries."""

    objects: List[NearEarthObject] = []
    dropped = 0
    for date_key, entries in payload.items():
        if not isinstance(entries, list):
            logger.warning("Skipping feed bucket %r: expected a list of entries", date_key)
            continue
        for raw in entries:
            try:
                objects.append(normalize_entry(raw))
            except FieldParseFailure as exc:
                dropped += 1
                logger.debug("Dropping feed entry from %s: %s", date_key, exc)
    logger.info("Normalized %d near-Earth objects (%d dropped)", len(objects), dropped)
    return objects


__all__ = ["normalize_entry", "normalize_feed"]
