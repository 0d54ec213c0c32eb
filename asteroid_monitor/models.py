"""Domain and view models backing the Asteroid Monitor application.

The dataclasses here are shared by the acquisition pipeline, the pure
presentation helpers and the Tk host, so none of them import tkinter.

Updates: v0.1 - 2026-10-12 - Added near-Earth object, filter/view state and
rendered view models.
Updates: v0.2 - 2026-10-16 - Added comment model for the local comment store.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

# Raw feed shape: date string -> vendor entries for that date.
RawPayload = Mapping[str, List[Dict[str, Any]]]


@dataclass(frozen=True)
class AppMetadata:
    name: str
    version: str
    author: str
    description: str


@dataclass(frozen=True)
class RuntimeConfig:
    """Injected runtime configuration; highest priority credential source."""

    nasa_api_key: Optional[str] = None
    neows_url: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RuntimeConfig":
        def _text(key: str) -> Optional[str]:
            value = payload.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
            return None

        return cls(nasa_api_key=_text("NASA_API_KEY"), neows_url=_text("NASA_NEOWS_URL"))


@dataclass(frozen=True)
class NearEarthObject:
    name: str
    estimated_diameter_m: float
    miss_distance_km: float
    relative_velocity_kmh: float
    is_hazardous: bool
    close_approach_date: str


class FilterState(str, Enum):
    ALL = "all"
    DANGEROUS = "dangerous"
    SAFE = "safe"

    @classmethod
    def coerce(cls, value: Union["FilterState", str]) -> "FilterState":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown filter: {value!r}")


class ViewMode(str, Enum):
    COLLAPSED = "collapsed"
    EXPANDED = "expanded"


@dataclass(frozen=True)
class ViewState:
    mode: ViewMode = ViewMode.COLLAPSED

    @property
    def is_full_list_expanded(self) -> bool:
        return self.mode is ViewMode.EXPANDED

    def toggled(self) -> "ViewState":
        if self.is_full_list_expanded:
            return ViewState(ViewMode.COLLAPSED)
        return ViewState(ViewMode.EXPANDED)


class FeedTier(str, Enum):
    LIVE = "live"
    SNAPSHOT = "snapshot"
    EMERGENCY = "emergency"
    DONE = "done"


@dataclass(frozen=True)
class TierFailure:
    tier: FeedTier
    error_kind: str
    message: str


@dataclass(frozen=True)
class AcquisitionResult:
    payload: RawPayload
    tier: FeedTier
    failures: Tuple[TierFailure, ...] = ()

    @property
    def degraded(self) -> bool:
        return self.tier is not FeedTier.LIVE


@dataclass(frozen=True)
class AsteroidStats:
    total: int = 0
    hazardous_count: int = 0
    safe_count: int = 0
    max_velocity: float = 0.0
    closest_in_moon_distances: Optional[float] = None


class Severity(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class RenderedItem:
    name: str
    badge: str
    date: str
    distance_text: str
    moon_distances_text: str
    velocity_text: str
    severity: Severity

    @property
    def severity_class(self) -> str:
        return f"danger-{self.severity.value}"

    def as_line(self) -> str:
        return (
            f"{self.name} [{self.badge}] | {self.date} | "
            f"{self.distance_text} km ({self.moon_distances_text} moons) | "
            f"{self.velocity_text} km/h"
        )


@dataclass(frozen=True)
class RenderedView:
    items: Tuple[RenderedItem, ...]
    placeholder: Optional[str]
    show_toggle: bool
    toggle_label: str
    total_count: int

    @property
    def visible_count(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class Banner:
    level: str
    text: str


@dataclass(frozen=True)
class Comment:
    name: str
    text: str
    rating: int
    date: str

    def as_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "text": self.text, "rating": self.rating, "date": self.date}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Optional["Comment"]:
        name = payload.get("name")
        text = payload.get("text")
        rating = payload.get("rating")
        date = payload.get("date")
        if not isinstance(name, str) or not isinstance(text, str):
            return None
        if not isinstance(rating, int) or isinstance(rating, bool):
            return None
        return cls(
            name=name,
            text=text,
            rating=rating,
            date=date if isinstance(date, str) else "",
        )


@dataclass(frozen=True)
class SummaryCounters:
    """Text for the summary regions of the host window."""

    total: str
    hazardous: str
    safe: str
    max_speed: str
    closest_moons: str
    filter_counts: Dict[FilterState, int] = field(default_factory=dict)


class TkQueueHandler(logging.Handler):
    """Logging handler that forwards formatted records to a Tk callback."""

    def __init__(self, callback: Callable[[int, str], None]) -> None:
        super().__init__()
        self._callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            self._callback(record.levelno, message)
        except Exception:  # pragma: no cover - guard against issues
            self.handleError(record)


__all__ = [
    "AcquisitionResult",
    "AppMetadata",
    "AsteroidStats",
    "Banner",
    "Comment",
    "FeedTier",
    "FilterState",
    "NearEarthObject",
    "RawPayload",
    "RenderedItem",
    "RenderedView",
    "RuntimeConfig",
    "Severity",
    "SummaryCounters",
    "TierFailure",
    "TkQueueHandler",
    "ViewMode",
    "ViewState",
]
