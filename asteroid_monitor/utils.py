"""Utility helpers shared across Asteroid Monitor modules.

Updates: v0.1 - 2026-10-12 - Kept environment helper; added numeric parsing,
grouped number formatting and feed date window helpers.
"""

from __future__ import annotations

import math
import os
from datetime import date, timedelta
from typing import Any, Optional, Tuple


def read_optional_env(name: str) -> Optional[str]:
    """Return trimmed environment variable or ``None`` when unset/blank."""

    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def sanitize_credential(value: Optional[str]) -> Optional[str]:
    """Mask a credential for logging, keeping only a short prefix."""

    if not value:
        return None
    if len(value) <= 4:
        return "***"
    return value[:4] + "…"


def parse_finite_float(value: Any) -> Optional[float]:
    """Parse numbers delivered as text or numeric JSON; ``None`` unless finite."""

    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def format_grouped_int(value: float, separator: str = ",") -> str:
    """Round to the nearest integer and group thousands with ``separator``."""

    rounded = int(round(value))
    grouped = f"{rounded:,}"
    if separator != ",":
        grouped = grouped.replace(",", separator)
    return grouped


def trailing_window(today: date, days: int) -> Tuple[str, str]:
    """Return ISO ``(start, end)`` dates for the ``days`` window ending ``today``."""

    start = today - timedelta(days=days)
    return start.isoformat(), today.isoformat()


__all__ = [
    "read_optional_env",
    "sanitize_credential",
    "parse_finite_float",
    "format_grouped_int",
    "trailing_window",
]
