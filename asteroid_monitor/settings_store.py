"""Persistent user preference helpers for Asteroid Monitor.

Only window and logging preferences are stored; the hazard filter and the
full-list toggle always start from their defaults.

Updates: v0.1 - 2026-10-12 - Narrowed persisted keys to window/logging preferences.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .config import DEFAULT_SETTINGS, SETTINGS_PATH, merge_settings

logger = logging.getLogger(__name__)


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load application settings from disk, falling back to defaults."""

    target = path or SETTINGS_PATH
    settings = DEFAULT_SETTINGS.copy()
    try:
        if target.exists():
            with target.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
            if isinstance(data, dict):
                settings = merge_settings(data)
    except (OSError, ValueError) as exc:
        logger.warning("Unable to load settings: %s", exc)
    return settings


def save_settings(settings: Dict[str, Any], path: Optional[Path] = None) -> None:
    """Persist application settings to disk."""

    target = path or SETTINGS_PATH
    payload = {key: settings[key] for key in DEFAULT_SETTINGS if key in settings}
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)
    except OSError as exc:  # pragma: no cover - IO issues
        logger.warning("Unable to save settings: %s", exc)


__all__ = ["load_settings", "save_settings"]
