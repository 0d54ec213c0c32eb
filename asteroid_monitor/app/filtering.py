"""Hazard filtering and closest-first ordering of near-Earth objects.

Updates: v0.1 - 2026-10-12 - Added the hazard category filter.
"""

from __future__ import annotations

from typing import Iterable, List, Union

from ..models import FilterState, NearEarthObject


def filter_objects(
    objects: Iterable[NearEarthObject], filter_state: Union[FilterState, str]
) -> List[NearEarthObject]:
    """Return the objects matching ``filter_state``, closest approach first.

    The input is never mutated. ``sorted`` is stable, so equal distances keep
    their feed order.
    """
    state = FilterState.coerce(filter_state)
    if state is FilterState.DANGEROUS:
        selected = [item for item in objects if item.is_hazardous]
    elif state is FilterState.SAFE:
        selected = [item for item in objects if not item.is_hazardous]
    else:
        selected = list(objects)
    return sorted(selected, key=lambda item: item.miss_distance_km)


__all__ = ["filter_objects"]
