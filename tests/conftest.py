"""Pytest configuration and shared fixtures for Asteroid Monitor tests.

- Prepend project root to sys.path so 'asteroid_monitor' is importable with testpaths.
- Provide builders for NeoWs-shaped entries and fake HTTP sessions so no test
  touches the network.
"""

from __future__ import annotations

import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import pytest


def _ensure_project_root_on_syspath() -> None:
    """Prepend repository root to sys.path for package imports."""
    tests_dir = Path(__file__).resolve().parent
    project_root = tests_dir.parent
    root_str = str(project_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_ensure_project_root_on_syspath()


def make_entry(
    name: str = "(2001 AB)",
    *,
    hazardous: bool = False,
    diameter: Any = 120.0,
    distance: Any = "1000000",
    velocity: Any = "36000",
    approach_date: str = "2024-10-22",
) -> Dict[str, Any]:
    """Build one vendor-shaped feed entry."""
    return {
        "name": name,
        "estimated_diameter": {"meters": {"estimated_diameter_max": diameter}},
        "is_potentially_hazardous_asteroid": hazardous,
        "close_approach_data": [
            {
                "close_approach_date": approach_date,
                "miss_distance": {"kilometers": distance},
                "relative_velocity": {"kilometers_per_hour": velocity},
            }
        ],
    }


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, *, invalid_json: bool = False):
        self.status_code = status_code
        self._payload = payload
        self._invalid_json = invalid_json

    def json(self) -> Any:
        if self._invalid_json:
            raise ValueError("Expecting value")
        return self._payload


class FakeSession:
    """Stand-in for requests.Session returning queued responses or raising.

    ``delays`` holds per-call sleep seconds, consumed in call order, for
    exercising tier budgets.
    """

    def __init__(self, *outcomes: Any, delays: Sequence[float] = ()) -> None:
        self.outcomes: List[Any] = list(outcomes)
        self.delays: List[float] = list(delays)
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params: Optional[Dict[str, str]] = None, timeout: Any = None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        outcome = self.outcomes.pop(0) if self.outcomes else FakeResponse(404)
        delay = self.delays.pop(0) if self.delays else 0.0
        if delay:
            time.sleep(delay)
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def entry_factory():
    return make_entry


@pytest.fixture
def missing_snapshot(tmp_path: Path) -> str:
    return str(tmp_path / "missing-backup.json")
