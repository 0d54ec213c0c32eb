"""Tests for summary statistics and counter formatting."""

from __future__ import annotations

import pytest

from asteroid_monitor.app.stats import aggregate, format_summary
from asteroid_monitor.emergency import build_emergency_payload
from asteroid_monitor.models import AsteroidStats, FilterState
from asteroid_monitor.normalize import normalize_feed


@pytest.fixture
def emergency_objects():
    return normalize_feed(build_emergency_payload())


def test_aggregate_emergency_dataset(emergency_objects) -> None:
    stats = aggregate(emergency_objects)

    assert stats.total == 4
    assert stats.hazardous_count == 2
    assert stats.safe_count == 2
    assert stats.max_velocity == 45_000.0
    assert stats.closest_in_moon_distances == pytest.approx(6.5)


def test_aggregate_empty_collection_has_no_closest() -> None:
    stats = aggregate([])
    assert stats == AsteroidStats()
    assert stats.closest_in_moon_distances is None


def test_aggregate_uses_given_moon_distance(emergency_objects) -> None:
    stats = aggregate(emergency_objects, moon_distance_km=1_000_000)
    assert stats.closest_in_moon_distances == pytest.approx(2.5)


def test_format_summary_groups_numbers(emergency_objects) -> None:
    summary = format_summary(aggregate(emergency_objects))

    assert summary.total == "4"
    assert summary.hazardous == "2"
    assert summary.safe == "2"
    assert summary.max_speed == "45,000"
    assert summary.closest_moons == "6.50"
    assert summary.filter_counts == {
        FilterState.ALL: 4,
        FilterState.DANGEROUS: 2,
        FilterState.SAFE: 2,
    }


def test_format_summary_marks_undefined_closest() -> None:
    summary = format_summary(AsteroidStats())
    assert summary.closest_moons == "–"
    assert summary.max_speed == "0"


def test_format_summary_custom_separator(emergency_objects) -> None:
    summary = format_summary(aggregate(emergency_objects), separator=".")
    assert summary.max_speed == "45.000"
