"""Explicit application state and its pure transitions.

The host owns a single :class:`AppState` value and replaces it wholesale on
every change, so the presenter never observes a half-updated collection.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple, Union

from ..models import AsteroidStats, FeedTier, FilterState, NearEarthObject, ViewState
from .filtering import filter_objects
from .stats import aggregate


@dataclass(frozen=True)
class AppState:
    objects: Tuple[NearEarthObject, ...] = ()
    filter_state: FilterState = FilterState.ALL
    view_state: ViewState = field(default_factory=ViewState)
    source_tier: Optional[FeedTier] = None
    stats: AsteroidStats = field(default_factory=AsteroidStats)
    loading: bool = False


def with_acquisition(
    state: AppState, objects: Sequence[NearEarthObject], tier: FeedTier
) -> AppState:
    """Swap in a freshly normalized collection; filter and view choices survive."""
    collection = tuple(objects)
    return replace(
        state,
        objects=collection,
        source_tier=tier,
        stats=aggregate(collection),
        loading=False,
    )


def with_filter(state: AppState, filter_state: Union[FilterState, str]) -> AppState:
    return replace(state, filter_state=FilterState.coerce(filter_state))


def with_view_toggled(state: AppState) -> AppState:
    return replace(state, view_state=state.view_state.toggled())


def with_loading(state: AppState, loading: bool) -> AppState:
    return replace(state, loading=loading)


def visible_subset(state: AppState) -> List[NearEarthObject]:
    return filter_objects(state.objects, state.filter_state)


__all__ = [
    "AppState",
    "visible_subset",
    "with_acquisition",
    "with_filter",
    "with_loading",
    "with_view_toggled",
]
