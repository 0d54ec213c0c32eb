"""Tests for application state transitions and the view controller."""

from __future__ import annotations

import pytest

from asteroid_monitor.app.controller.view_controller import ViewController
from asteroid_monitor.app.state import (
    AppState,
    visible_subset,
    with_acquisition,
    with_filter,
    with_loading,
    with_view_toggled,
)
from asteroid_monitor.emergency import build_emergency_payload
from asteroid_monitor.models import FeedTier, FilterState, ViewMode
from asteroid_monitor.normalize import normalize_feed


@pytest.fixture
def objects():
    return normalize_feed(build_emergency_payload())


def test_default_state_is_all_and_collapsed() -> None:
    state = AppState()
    assert state.filter_state is FilterState.ALL
    assert state.view_state.mode is ViewMode.COLLAPSED
    assert state.source_tier is None
    assert state.objects == ()


def test_acquisition_replaces_collection_and_stats(objects) -> None:
    state = with_loading(AppState(), True)
    state = with_acquisition(state, objects, FeedTier.EMERGENCY)

    assert len(state.objects) == 4
    assert state.stats.total == 4
    assert state.source_tier is FeedTier.EMERGENCY
    assert state.loading is False


def test_acquisition_preserves_filter_and_view(objects) -> None:
    state = with_view_toggled(with_filter(AppState(), FilterState.SAFE))
    refreshed = with_acquisition(state, objects, FeedTier.LIVE)

    assert refreshed.filter_state is FilterState.SAFE
    assert refreshed.view_state.is_full_list_expanded


def test_filter_change_preserves_view_state(objects) -> None:
    state = with_view_toggled(with_acquisition(AppState(), objects, FeedTier.LIVE))
    assert with_filter(state, "dangerous").view_state.is_full_list_expanded


def test_transitions_return_new_states(objects) -> None:
    original = with_acquisition(AppState(), objects, FeedTier.LIVE)
    changed = with_filter(original, FilterState.DANGEROUS)
    assert original.filter_state is FilterState.ALL
    assert changed is not original


def test_visible_subset_follows_filter(objects) -> None:
    state = with_filter(with_acquisition(AppState(), objects, FeedTier.LIVE), "dangerous")
    assert [item.name for item in visible_subset(state)] == ["2024 XY1", "2024 CD3"]


class _FakeHost:
    def __init__(self, state: AppState) -> None:
        self.app_state = state
        self.renders = 0

    def render_state(self) -> None:
        self.renders += 1


def test_view_controller_select_filter_rerenders(objects) -> None:
    host = _FakeHost(with_acquisition(AppState(), objects, FeedTier.LIVE))
    controller = ViewController(host)

    controller.select_filter("safe")

    assert host.app_state.filter_state is FilterState.SAFE
    assert len(host.app_state.objects) == 4
    assert host.renders == 1


def test_view_controller_rejects_unknown_filter() -> None:
    host = _FakeHost(AppState())
    with pytest.raises(ValueError):
        ViewController(host).select_filter("comets")
    assert host.renders == 0


def test_view_controller_toggle_twice_round_trips() -> None:
    host = _FakeHost(AppState())
    controller = ViewController(host)

    controller.toggle_full_list()
    assert host.app_state.view_state.is_full_list_expanded
    controller.toggle_full_list()
    assert not host.app_state.view_state.is_full_list_expanded
    assert host.renders == 2
