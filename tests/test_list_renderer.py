"""Tests for writing presenter output into the list region.

Widgets are replaced with small recorders, so no display is required; a
final smoke test builds the real window when Tk and a display are available.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List

import pytest

from asteroid_monitor.app.renderers.list_renderer import ListRenderer
from asteroid_monitor.app.rendering import NO_RESULTS_TEXT, present
from asteroid_monitor.models import NearEarthObject, ViewState


class _RecordingText:
    def __init__(self) -> None:
        self.inserts: List[tuple] = []
        self.states: List[str] = []
        self.cleared = 0

    def configure(self, **options: Any) -> None:
        self.states.append(options.get("state"))

    def delete(self, _start: str, _end: str) -> None:
        self.cleared += 1
        self.inserts.clear()

    def insert(self, _index: str, text: str, tags: tuple = ()) -> None:
        self.inserts.append((text, tags))


class _RecordingButton:
    def __init__(self) -> None:
        self.text = None
        self.packed = False

    def configure(self, **options: Any) -> None:
        self.text = options.get("text", self.text)

    def pack(self, **_options: Any) -> None:
        self.packed = True

    def pack_forget(self) -> None:
        self.packed = False


class _Host:
    def __init__(self) -> None:
        self.listbox = _RecordingText()
        self.toggle_full_list_btn = _RecordingButton()


def _neo(index: int, hazardous: bool = False) -> NearEarthObject:
    return NearEarthObject(
        name=f"NEO {index}",
        estimated_diameter_m=40.0,
        miss_distance_km=1_000_000.0 + index,
        relative_velocity_kmh=25_000.0,
        is_hazardous=hazardous,
        close_approach_date="2024-10-22",
    )


def test_render_writes_rows_with_severity_tags() -> None:
    host = _Host()
    view = present([_neo(1, hazardous=True), _neo(2)], ViewState())

    ListRenderer(host).render(view)

    titles = [text for text, tags in host.listbox.inserts if tags in (("high",), ("low",))]
    assert titles == ["1. NEO 1 [HAZARDOUS]", "2. NEO 2 [SAFE]"]
    assert host.listbox.states[-1] == "disabled"
    assert host.toggle_full_list_btn.packed is False


def test_metadata_line_uses_pipe_separators() -> None:
    host = _Host()

    ListRenderer(host).render(present([_neo(1)], ViewState()))

    metadata = [text for text, tags in host.listbox.inserts if tags == ("metadata",)]
    assert len(metadata) == 1
    assert metadata[0].startswith(" | 2024-10-22 | ")
    assert metadata[0].endswith(" km/h")
    assert "—" not in metadata[0]


def test_render_placeholder_for_empty_view() -> None:
    host = _Host()

    ListRenderer(host).render(present([], ViewState()))

    assert (NO_RESULTS_TEXT, ("message",)) in host.listbox.inserts


def test_toggle_button_follows_view() -> None:
    host = _Host()
    renderer = ListRenderer(host)
    subset = [_neo(index) for index in range(51)]

    renderer.render(present(subset, ViewState()))
    assert host.toggle_full_list_btn.packed is True
    assert host.toggle_full_list_btn.text == "Show full list"

    renderer.render(present(subset, ViewState().toggled()))
    assert host.toggle_full_list_btn.text == "Hide full list"

    renderer.render(present(subset[:10], ViewState()))
    assert host.toggle_full_list_btn.packed is False


def test_window_smoke(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    tk = pytest.importorskip("tkinter", reason="Tkinter not available; skipping window test.")
    try:
        root = tk.Tk()
    except tk.TclError:
        pytest.skip("No display available for Tk.")
    root.destroy()

    from asteroid_monitor import application, settings_store
    from asteroid_monitor.comments_store import CommentStore
    from asteroid_monitor.emergency import build_emergency_payload
    from asteroid_monitor.models import AcquisitionResult, FeedTier, FilterState
    from asteroid_monitor.normalize import normalize_feed

    monkeypatch.setattr(settings_store, "SETTINGS_PATH", tmp_path / "settings.json")

    class _IdleAcquirer:
        feed_url = "https://api.nasa.gov/neo/rest/v1/feed"

    app = application.AsteroidMonitorApp(
        acquirer=_IdleAcquirer(), comment_store=CommentStore(tmp_path / "comments.json")
    )
    try:
        payload = build_emergency_payload()
        app.apply_acquisition(
            AcquisitionResult(payload=payload, tier=FeedTier.EMERGENCY),
            normalize_feed(payload),
        )
        assert app.summary_vars["total"].get() == "4"
        assert app.filter_buttons[FilterState.DANGEROUS].cget("text") == "Hazardous (2)"
        assert "Emergency mode" in app.banner_var.get()
        app.view_controller.select_filter("safe")
        assert app.app_state.filter_state is FilterState.SAFE
    finally:
        app._on_close()


def test_apply_acquisition_logs_each_tier_failure_once(caplog: pytest.LogCaptureFixture) -> None:
    pytest.importorskip("tkinter", reason="Tkinter not available; skipping window test.")
    import asyncio
    import logging

    from asteroid_monitor import application
    from asteroid_monitor.acquisition import FeedAcquirer
    from asteroid_monitor.app.state import AppState
    from asteroid_monitor.models import FeedTier
    from asteroid_monitor.normalize import normalize_feed

    from conftest import FakeResponse, FakeSession

    acquirer = FeedAcquirer(
        session=FakeSession(FakeResponse(500, {})),
        snapshot_source="https://mirror.example.test/backup.json",
    )
    renders: List[AppState] = []

    class _Host:
        app_state = AppState()

        def render_state(self) -> None:
            renders.append(self.app_state)

    host = _Host()
    with caplog.at_level(logging.INFO):
        result = asyncio.run(acquirer.acquire())
        application.AsteroidMonitorApp.apply_acquisition(
            host, result, normalize_feed(result.payload)
        )

    assert result.tier is FeedTier.EMERGENCY
    failure_lines = [r for r in caplog.records if "tier failed" in r.getMessage()]
    assert [r.levelno for r in failure_lines] == [logging.WARNING, logging.WARNING]
    assert renders[-1].source_tier is FeedTier.EMERGENCY
