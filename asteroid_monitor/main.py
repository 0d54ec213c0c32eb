"""Application entrypoint wiring for Asteroid Monitor.

The Tk host lives in ``application.py`` and is imported lazily so metadata
stays importable on machines without a display.

Updates: v0.1 - 2026-10-12 - Added metadata and launcher for the asteroid dashboard.
Updates: v0.2 - 2026-10-16 - Runtime config path can be passed to ``main``.
"""

from __future__ import annotations

import importlib
import logging
from typing import Optional

from .models import AppMetadata

logger = logging.getLogger(__name__)

APP_VERSION = "0.2"
APP_METADATA = AppMetadata(
    name="Asteroid Monitor",
    version=f"v{APP_VERSION}",
    author="Asteroid Monitor contributors",
    description=(
        "Tkinter dashboard for near-Earth objects from NASA NeoWs with snapshot "
        "and emergency fallbacks."
    ),
)


def main(config_path: Optional[str] = None) -> None:
    """Launch the Asteroid Monitor Tk application."""

    logger.debug("Bootstrapping Asteroid Monitor main loop")

    config = importlib.import_module("asteroid_monitor.config")
    acquisition = importlib.import_module("asteroid_monitor.acquisition")
    application = importlib.import_module("asteroid_monitor.application")

    acquirer = acquisition.FeedAcquirer(config.load_runtime_config(config_path))
    app = application.AsteroidMonitorApp(acquirer=acquirer)
    app.mainloop()


__all__ = ["APP_METADATA", "APP_VERSION", "main"]
