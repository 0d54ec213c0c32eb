"""Tests for the pure presenter: preview window, toggle, severity and banners."""

from __future__ import annotations

from typing import Optional

import pytest

from asteroid_monitor.app.rendering import (
    HIDE_FULL_LIST_LABEL,
    NO_RESULTS_TEXT,
    SHOW_FULL_LIST_LABEL,
    banner_for_tier,
    classify_severity,
    compose_screen,
    present,
    render_item,
)
from asteroid_monitor.app.state import AppState, with_acquisition, with_filter, with_view_toggled
from asteroid_monitor.models import FeedTier, FilterState, NearEarthObject, Severity, ViewState


def _neo(index: int, *, hazardous: bool = False, distance: Optional[float] = None) -> NearEarthObject:
    return NearEarthObject(
        name=f"NEO {index}",
        estimated_diameter_m=50.0,
        miss_distance_km=distance if distance is not None else 1_000_000.0 + index,
        relative_velocity_kmh=20_000.0,
        is_hazardous=hazardous,
        close_approach_date="2024-10-22",
    )


def _subset(count: int):
    return [_neo(index) for index in range(count)]


def test_preview_is_capped_at_fifty() -> None:
    view = present(_subset(120), ViewState())

    assert view.visible_count == 50
    assert view.total_count == 120
    assert view.show_toggle is True
    assert view.toggle_label == SHOW_FULL_LIST_LABEL
    assert view.placeholder is None


def test_expanded_view_shows_everything() -> None:
    view = present(_subset(120), ViewState().toggled())

    assert view.visible_count == 120
    assert view.toggle_label == HIDE_FULL_LIST_LABEL


def test_toggling_twice_restores_preview() -> None:
    subset = _subset(120)
    assert present(subset, ViewState().toggled().toggled()) == present(subset, ViewState())


def test_exactly_fifty_has_no_toggle() -> None:
    view = present(_subset(50), ViewState())
    assert view.visible_count == 50
    assert view.show_toggle is False


def test_small_subset_has_no_toggle() -> None:
    view = present(_subset(3), ViewState())
    assert view.visible_count == 3
    assert view.show_toggle is False


def test_empty_subset_shows_placeholder() -> None:
    view = present([], ViewState())
    assert view.items == ()
    assert view.placeholder == NO_RESULTS_TEXT
    assert view.show_toggle is False


def test_present_is_idempotent() -> None:
    subset = _subset(60)
    assert present(subset, ViewState()) == present(subset, ViewState())


def test_preview_keeps_subset_order() -> None:
    subset = _subset(60)
    view = present(subset, ViewState())
    assert [item.name for item in view.items] == [item.name for item in subset[:50]]


def test_custom_preview_limit() -> None:
    view = present(_subset(5), ViewState(), preview_limit=2)
    assert view.visible_count == 2
    assert view.show_toggle is True


@pytest.mark.parametrize(
    "hazardous, distance, expected",
    [
        (True, 2_500_000, Severity.HIGH),
        (True, 7_480_000, Severity.MEDIUM),
        (True, 9_000_000, Severity.MEDIUM),
        (False, 1_000, Severity.LOW),
    ],
)
def test_classify_severity(hazardous, distance, expected) -> None:
    assert classify_severity(_neo(1, hazardous=hazardous, distance=distance)) is expected


def test_render_item_formats_numbers() -> None:
    item = render_item(_neo(1, hazardous=True, distance=2_500_000.4))

    assert item.badge == "HAZARDOUS"
    assert item.distance_text == "2,500,000"
    assert item.moon_distances_text == "6.50"
    assert item.velocity_text == "20,000"
    assert item.severity_class == "danger-high"
    assert item.as_line() == (
        "NEO 1 [HAZARDOUS] | 2024-10-22 | 2,500,000 km (6.50 moons) | 20,000 km/h"
    )


def test_render_item_safe_badge() -> None:
    assert render_item(_neo(2)).badge == "SAFE"


def test_banner_for_each_tier() -> None:
    assert banner_for_tier(None) is None
    assert banner_for_tier(FeedTier.LIVE) is None
    snapshot = banner_for_tier(FeedTier.SNAPSHOT)
    emergency = banner_for_tier(FeedTier.EMERGENCY)
    assert snapshot.level == "warning"
    assert "snapshot" in snapshot.text.lower()
    assert emergency.level == "danger"
    assert "emergency" in emergency.text.lower()


def test_compose_screen_combines_filter_view_and_tier() -> None:
    objects = [_neo(index, hazardous=index % 2 == 0) for index in range(130)]
    state = with_acquisition(AppState(), objects, FeedTier.SNAPSHOT)
    state = with_view_toggled(with_filter(state, FilterState.DANGEROUS))

    screen = compose_screen(state)

    assert screen.view.total_count == 65
    assert screen.view.visible_count == 65
    assert screen.view.toggle_label == HIDE_FULL_LIST_LABEL
    assert screen.summary.total == "130"
    assert screen.banner is not None and screen.banner.level == "warning"
    assert screen.loading is False


def test_compose_screen_default_state_is_empty() -> None:
    screen = compose_screen(AppState())
    assert screen.view.placeholder == NO_RESULTS_TEXT
    assert screen.summary.closest_moons == "–"
    assert screen.banner is None
