"""UI-agnostic presentation helpers: preview window, row formatting, banners.

``present`` is a pure function of the sorted subset and the view state, so the
host can re-render (for example after a toggle) without refetching or
refiltering and always gets identical output for identical input.

Updates: v0.1 - 2026-10-12 - Replaced age bucketing with preview pagination,
severity classification and degraded-tier banners.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..config import DANGER_THRESHOLD_KM, MOON_DISTANCE_KM, PREVIEW_LIMIT, THOUSANDS_SEPARATOR
from ..models import (
    Banner,
    FeedTier,
    NearEarthObject,
    RenderedItem,
    RenderedView,
    Severity,
    SummaryCounters,
    ViewState,
)
from ..utils import format_grouped_int
from .state import AppState, visible_subset
from .stats import format_summary

NO_RESULTS_TEXT = "No asteroids match this filter"
SHOW_FULL_LIST_LABEL = "Show full list"
HIDE_FULL_LIST_LABEL = "Hide full list"

_TIER_BANNERS = {
    FeedTier.SNAPSHOT: Banner(
        level="warning",
        text="Offline mode: showing snapshot data - NASA API unavailable",
    ),
    FeedTier.EMERGENCY: Banner(
        level="danger",
        text="Emergency mode: NASA API and snapshot unavailable",
    ),
}


def classify_severity(
    item: NearEarthObject, threshold_km: float = DANGER_THRESHOLD_KM
) -> Severity:
    """Hazardous and inside the threshold is high; hazardous alone is medium."""
    if item.is_hazardous and item.miss_distance_km < threshold_km:
        return Severity.HIGH
    if item.is_hazardous:
        return Severity.MEDIUM
    return Severity.LOW


def render_item(
    item: NearEarthObject,
    *,
    moon_distance_km: float = MOON_DISTANCE_KM,
    threshold_km: float = DANGER_THRESHOLD_KM,
    separator: str = THOUSANDS_SEPARATOR,
) -> RenderedItem:
    return RenderedItem(
        name=item.name,
        badge="HAZARDOUS" if item.is_hazardous else "SAFE",
        date=item.close_approach_date or "unknown date",
        distance_text=format_grouped_int(item.miss_distance_km, separator),
        moon_distances_text=f"{item.miss_distance_km / moon_distance_km:.2f}",
        velocity_text=format_grouped_int(item.relative_velocity_kmh, separator),
        severity=classify_severity(item, threshold_km),
    )


def present(
    sorted_subset: Sequence[NearEarthObject],
    view_state: ViewState,
    *,
    preview_limit: int = PREVIEW_LIMIT,
) -> RenderedView:
    """Select the preview or full window of ``sorted_subset`` and format it."""
    total = len(sorted_subset)
    if view_state.is_full_list_expanded:
        window = sorted_subset
    else:
        window = sorted_subset[:preview_limit]
    return RenderedView(
        items=tuple(render_item(item) for item in window),
        placeholder=NO_RESULTS_TEXT if total == 0 else None,
        show_toggle=total > preview_limit,
        toggle_label=(
            HIDE_FULL_LIST_LABEL if view_state.is_full_list_expanded else SHOW_FULL_LIST_LABEL
        ),
        total_count=total,
    )


def banner_for_tier(tier: Optional[FeedTier]) -> Optional[Banner]:
    """Advisory banner for degraded tiers; ``None`` for live data."""
    if tier is None:
        return None
    return _TIER_BANNERS.get(tier)


@dataclass(frozen=True)
class ScreenModel:
    """Everything the host writes into its regions for one state."""

    view: RenderedView
    summary: SummaryCounters
    banner: Optional[Banner]
    loading: bool


def compose_screen(state: AppState) -> ScreenModel:
    return ScreenModel(
        view=present(visible_subset(state), state.view_state),
        summary=format_summary(state.stats),
        banner=banner_for_tier(state.source_tier),
        loading=state.loading,
    )


__all__ = [
    "HIDE_FULL_LIST_LABEL",
    "NO_RESULTS_TEXT",
    "SHOW_FULL_LIST_LABEL",
    "ScreenModel",
    "banner_for_tier",
    "classify_severity",
    "compose_screen",
    "present",
    "render_item",
]
