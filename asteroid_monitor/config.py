"""Configuration primitives and static data for Asteroid Monitor.

This module centralises feed endpoints, tier time budgets, display constants,
default settings and storage paths so other layers can import them without
side effects beyond reading the environment (and an optional ``.env`` file).

Updates: v0.1 - 2026-10-12 - Added NeoWs feed endpoint, tier budgets and display constants.
Updates: v0.2 - 2026-10-16 - Added runtime config file and credential resolution.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from .models import RuntimeConfig
from .utils import read_optional_env, sanitize_credential

load_dotenv()

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float, minimum: float) -> float:
    try:
        return max(minimum, float(os.getenv(name, str(default))))
    except ValueError:
        return default


# --- Feed sources ------------------------------------------------------------------------------

NEOWS_FEED_URL = os.getenv("NASA_NEOWS_URL", "https://api.nasa.gov/neo/rest/v1/feed")
API_KEY_ENV_VAR = "NASA_API_KEY"
PLACEHOLDER_API_KEY = "DEMO_KEY"
FEED_WINDOW_DAYS = 7

LIVE_FEED_TIMEOUT_SECONDS = _env_float("NEO_LIVE_TIMEOUT", 10.0, 0.1)
SNAPSHOT_TIMEOUT_SECONDS = _env_float("NEO_SNAPSHOT_TIMEOUT", 5.0, 0.1)

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"
SNAPSHOT_SOURCE = os.getenv("NEO_SNAPSHOT_SOURCE", str(PACKAGE_DATA_DIR / "backup.json"))

USER_AGENT = "AsteroidMonitor/0.2 (+https://api.nasa.gov)"


# --- Display constants -------------------------------------------------------------------------

MOON_DISTANCE_KM = 384_400.0
# Roughly 0.05 AU, the MOID bound used for potentially hazardous asteroids.
DANGER_THRESHOLD_KM = 7_480_000.0
PREVIEW_LIMIT = 50
THOUSANDS_SEPARATOR = os.getenv("NEO_THOUSANDS_SEPARATOR", ",")


# --- Settings and local storage ----------------------------------------------------------------

_LOCAL_APPDATA = os.getenv("LOCALAPPDATA")
_XDG_CONFIG_HOME = os.getenv("XDG_CONFIG_HOME")

if os.name == "nt":
    base_dir = (
        Path(_LOCAL_APPDATA)
        if _LOCAL_APPDATA
        else Path.home() / "AppData" / "Local"
    )
else:
    base_dir = (
        Path(_XDG_CONFIG_HOME)
        if _XDG_CONFIG_HOME
        else Path.home() / ".config"
    )
_APP_DIR = base_dir / "AsteroidMonitor"

SETTINGS_PATH = Path(os.getenv("NEO_APP_SETTINGS", str(_APP_DIR / "settings.json")))
COMMENTS_PATH = Path(os.getenv("NEO_APP_COMMENTS", str(SETTINGS_PATH.parent / "comments.json")))
RUNTIME_CONFIG_PATH = read_optional_env("NEO_APP_CONFIG")
MAX_COMMENTS = 50

DEFAULT_SETTINGS: Dict[str, Any] = {
    "window_geometry": "1000x700",
    "debug_mode": False,
    "log_visible": False,
}


def merge_settings(overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Apply overrides on top of the default settings."""

    merged = DEFAULT_SETTINGS.copy()
    merged.update({key: value for key, value in overrides.items() if key in merged})
    return merged


# --- Runtime configuration and credentials -----------------------------------------------------


def load_runtime_config(path: Optional[str | os.PathLike[str]] = None) -> RuntimeConfig:
    """Read the optional JSON runtime config; an unusable file yields an empty config."""

    target = path if path is not None else RUNTIME_CONFIG_PATH
    if not target:
        return RuntimeConfig()
    try:
        with Path(target).open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError) as exc:
        logger.warning("Unable to load runtime config '%s': %s", target, exc)
        return RuntimeConfig()
    if not isinstance(data, dict):
        logger.warning("Runtime config '%s' is not a JSON object; ignoring it.", target)
        return RuntimeConfig()
    return RuntimeConfig.from_dict(data)


def resolve_api_key(runtime_config: Optional[RuntimeConfig] = None) -> str:
    """Pick the NeoWs credential: runtime config, then environment, then placeholder."""

    if runtime_config is not None and runtime_config.nasa_api_key:
        return runtime_config.nasa_api_key
    env_key = read_optional_env(API_KEY_ENV_VAR)
    if env_key:
        return env_key
    logger.warning(
        "No NASA API key configured (set %s); using placeholder %s.",
        API_KEY_ENV_VAR,
        sanitize_credential(PLACEHOLDER_API_KEY),
    )
    return PLACEHOLDER_API_KEY


def resolve_feed_url(runtime_config: Optional[RuntimeConfig] = None) -> str:
    if runtime_config is not None and runtime_config.neows_url:
        return runtime_config.neows_url
    return NEOWS_FEED_URL


__all__ = [
    "API_KEY_ENV_VAR",
    "COMMENTS_PATH",
    "DANGER_THRESHOLD_KM",
    "DEFAULT_SETTINGS",
    "FEED_WINDOW_DAYS",
    "LIVE_FEED_TIMEOUT_SECONDS",
    "MAX_COMMENTS",
    "MOON_DISTANCE_KM",
    "NEOWS_FEED_URL",
    "PACKAGE_DATA_DIR",
    "PLACEHOLDER_API_KEY",
    "PREVIEW_LIMIT",
    "RUNTIME_CONFIG_PATH",
    "SETTINGS_PATH",
    "SNAPSHOT_SOURCE",
    "SNAPSHOT_TIMEOUT_SECONDS",
    "THOUSANDS_SEPARATOR",
    "USER_AGENT",
    "load_runtime_config",
    "merge_settings",
    "resolve_api_key",
    "resolve_feed_url",
]
