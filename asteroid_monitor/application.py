"""Tkinter host window for Asteroid Monitor.

Updates: v0.1 - 2026-10-12 - Host renders a single immutable AppState through the
pure presenter; acquisition runs through the refresh controller.
Updates: v0.2 - 2026-10-16 - Added comment panel and persisted log visibility.
"""

from __future__ import annotations

import logging
import tkinter as tk
from collections import deque
from typing import Any, Dict, List, Optional, Sequence

from .acquisition import FeedAcquirer
from .app.controller import RefreshController, ViewController
from .app.rendering import ScreenModel, banner_for_tier, compose_screen
from .app.renderers.list_renderer import ListRenderer
from .app.state import AppState, with_acquisition, with_loading
from .app.views.comments_panel import build_comments_panel
from .app.views.controls_panel import FILTER_LABELS, build_controls_panel
from .app.views.list_view import build_list_view
from .app.views.logs_panel import build_logs_panel
from .app.views.summary_panel import build_summary_panel, update_summary_panel
from .comments_store import CommentStore
from .config import DEFAULT_SETTINGS, load_runtime_config
from .main import APP_METADATA
from .models import AcquisitionResult, Banner, FeedTier, NearEarthObject, TkQueueHandler
from .settings_store import load_settings, save_settings

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
_LOG_DATEFMT = "%H:%M:%S"
_MAX_LOG_LINES = 500
_BANNER_COLORS = {"warning": "#5C4400", "danger": "#6B0F1A"}


class AsteroidMonitorApp(tk.Tk):
    """Tkinter window listing near-Earth objects from the NeoWs feed."""

    def __init__(
        self,
        acquirer: Optional[FeedAcquirer] = None,
        comment_store: Optional[CommentStore] = None,
    ) -> None:
        super().__init__()
        self.title(f"{APP_METADATA.name} {APP_METADATA.version}")
        self.geometry(DEFAULT_SETTINGS["window_geometry"])
        self.configure(bg="black")

        self.app_state: AppState = AppState()
        self.log_buffer: deque[tuple[int, str]] = deque()
        self._loading_settings = True

        self.protocol("WM_DELETE_WINDOW", self._on_close)

        self.log_handler = TkQueueHandler(self._handle_log_record)
        self.log_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))
        self.log_handler.setLevel(logging.INFO)
        self.root_logger = logging.getLogger()
        self.root_logger.setLevel(logging.DEBUG)
        for handler in list(self.root_logger.handlers):
            if isinstance(handler, TkQueueHandler):
                self.root_logger.removeHandler(handler)
        self.root_logger.addHandler(self.log_handler)
        self.console_handler = logging.StreamHandler()
        self.console_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))
        self.console_handler.setLevel(logging.INFO)
        self.root_logger.addHandler(self.console_handler)

        self.settings: Dict[str, Any] = load_settings()
        stored_geometry = self.settings.get("window_geometry")
        if isinstance(stored_geometry, str) and stored_geometry.strip():
            try:
                self.geometry(stored_geometry)
            except tk.TclError:
                logger.debug("Ignoring invalid stored geometry value: %s", stored_geometry)
        self.log_visible = False

        self.acquirer = acquirer or FeedAcquirer(load_runtime_config())
        self.comment_store = comment_store or CommentStore()
        self.refresh_controller = RefreshController(self, self.acquirer)
        self.view_controller = ViewController(self)

        tk.Label(
            self,
            text=APP_METADATA.name,
            bg="black",
            fg="#89CFF0",
            font=("Segoe UI", 20, "bold"),
        ).pack(anchor="w", padx=10, pady=(10, 0))
        build_summary_panel(self)
        build_controls_panel(self)
        build_list_view(self)
        self.list_renderer = ListRenderer(self)
        build_comments_panel(self)
        build_logs_panel(self)

        self._update_handler_level()
        if bool(self.settings.get("log_visible", False)):
            self.toggle_logs()
        self._loading_settings = False
        self._save_settings()

        logger.info(
            "%s %s started; feed endpoint %s",
            APP_METADATA.name,
            APP_METADATA.version,
            self.acquirer.feed_url,
        )
        self.render_state()
        self.after(0, self.refresh_controller.refresh)
        self.after(0, self._flush_log_buffer)

    # Host surface used by the controllers.

    def set_loading(self, loading: bool) -> None:
        self.app_state = with_loading(self.app_state, loading)
        self._apply_loading(loading)

    def show_tier_advisory(self, tier: FeedTier) -> None:
        """Announce a fallback as soon as the acquirer enters it."""
        if tier is FeedTier.SNAPSHOT:
            logger.warning("NASA API unavailable; loading snapshot data.")
        elif tier is FeedTier.EMERGENCY:
            logger.warning("Snapshot unavailable; using built-in emergency data.")
        self._show_banner(banner_for_tier(tier))

    def apply_acquisition(
        self, result: AcquisitionResult, objects: Sequence[NearEarthObject]
    ) -> None:
        self.app_state = with_acquisition(self.app_state, objects, result.tier)
        logger.info(
            "Loaded %d asteroids from the %s tier.", len(self.app_state.objects), result.tier.value
        )
        self.render_state()

    def handle_fetch_error(self, exc: Exception) -> None:
        self.app_state = with_loading(self.app_state, False)
        logger.error("Asteroid refresh failed: %s", exc)
        self.render_state()

    def render_state(self) -> None:
        screen = compose_screen(self.app_state)
        update_summary_panel(self, screen.summary)
        self._update_filter_buttons(screen)
        self._show_banner(screen.banner)
        self._apply_loading(screen.loading)
        self.list_renderer.render(screen.view)

    # Region updates.

    def _update_filter_buttons(self, screen: ScreenModel) -> None:
        for filter_state, button in self.filter_buttons.items():
            count = screen.summary.filter_counts.get(filter_state, 0)
            relief = "sunken" if filter_state is self.app_state.filter_state else "raised"
            button.configure(text=f"{FILTER_LABELS[filter_state]} ({count})", relief=relief)

    def _show_banner(self, banner: Optional[Banner]) -> None:
        if banner is None:
            self.banner_label.pack_forget()
            return
        self.banner_var.set(banner.text)
        self.banner_label.configure(bg=_BANNER_COLORS.get(banner.level, "#5C4400"))
        if not self.banner_label.winfo_manager():
            self.banner_label.pack(fill="x", pady=(5, 0))

    def _apply_loading(self, loading: bool) -> None:
        if loading:
            if not self.loading_label.winfo_manager():
                self.loading_label.pack(fill="x", pady=(5, 0))
            self.refresh_btn.configure(text="Refreshing…")
        else:
            self.loading_label.pack_forget()
            self.refresh_btn.configure(text="Refresh")

    # Logs and settings.

    def toggle_logs(self) -> None:
        if self.log_visible:
            self.log_frame.pack_forget()
            self.log_visible = False
            self.toggle_logs_btn.config(text="Show Logs")
        else:
            self.log_frame.pack(fill="both", expand=True, padx=10, pady=(0, 10))
            self.log_visible = True
            self.toggle_logs_btn.config(text="Hide Logs")
            self._flush_log_buffer()
        self.settings["log_visible"] = self.log_visible
        self._save_settings()

    def toggle_debug_mode(self) -> None:
        self.settings["debug_mode"] = bool(self.debug_var.get())
        self._update_handler_level()
        self._save_settings()

    def _update_handler_level(self) -> None:
        if bool(self.debug_var.get()):
            self.log_handler.setLevel(logging.DEBUG)
            self.console_handler.setLevel(logging.DEBUG)
            logger.info("Debug logging enabled.")
        else:
            self.log_handler.setLevel(logging.INFO)
            self.console_handler.setLevel(logging.INFO)
            logger.debug("Debug logging disabled; showing INFO and above.")

    def _handle_log_record(self, level: int, message: str) -> None:
        self.log_buffer.append((level, message))
        try:
            self.after(0, self._flush_log_buffer)
        except (RuntimeError, tk.TclError):
            # Window already destroyed; the console handler still has the record.
            pass

    def _flush_log_buffer(self) -> None:
        if not hasattr(self, "log_text"):
            return
        lines: List[str] = []
        while self.log_buffer:
            _level, msg = self.log_buffer.popleft()
            lines.append(msg)
        for line in lines:
            self._append_log_line(line)

    def _append_log_line(self, message: str) -> None:
        self.log_text.config(state="normal")
        self.log_text.insert(tk.END, message + "\n")
        line_count = int(self.log_text.index("end-1c").split(".")[0])
        if line_count > _MAX_LOG_LINES:
            self.log_text.delete("1.0", f"{line_count - _MAX_LOG_LINES}.0")
        self.log_text.see(tk.END)
        self.log_text.config(state="disabled")

    def _save_settings(self) -> None:
        if self._loading_settings:
            return
        save_settings(self.settings)

    def _on_close(self) -> None:
        geometry = self.geometry()
        if geometry:
            self.settings["window_geometry"] = geometry
        self._save_settings()
        self.root_logger.removeHandler(self.log_handler)
        self.root_logger.removeHandler(self.console_handler)
        self.destroy()


__all__ = ["AsteroidMonitorApp"]
