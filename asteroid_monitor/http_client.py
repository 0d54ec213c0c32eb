"""Shared HTTP session management for Asteroid Monitor feed requests.

Updates: v0.1 - 2026-10-12 - Kept pooled session helpers; dropped redirect
resolution and narrowed the retry policy so it stays inside a tier budget.
"""

from __future__ import annotations

import atexit
import threading
from typing import Iterable, Sequence, Set

import requests
from requests import Session
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from .config import USER_AGENT

_HTTP_THREAD_LOCAL = threading.local()
_HTTP_SESSION_LOCK = threading.Lock()
_HTTP_SESSIONS: Set[Session] = set()
_RETRY_STATUSES: Set[int] = {
    429,
    500,
    502,
    503,
    504,
}


def set_retry_statuses(statuses: Iterable[int]) -> None:
    """Override the status codes considered retryable for shared sessions."""

    global _RETRY_STATUSES
    _RETRY_STATUSES = {int(code) for code in statuses}


def _build_retry() -> Retry:
    return Retry(  # pragma: no cover - network configuration
        total=1,
        backoff_factor=0.3,
        status_forcelist=list(_RETRY_STATUSES),
        allowed_methods=["HEAD", "GET", "OPTIONS"],
        raise_on_status=False,
    )


def get_http_session() -> Session:
    """Return a thread-local shared requests session configured with retries."""

    session = getattr(_HTTP_THREAD_LOCAL, "session", None)
    if session is not None:
        return session
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=2, pool_maxsize=4, max_retries=_build_retry())
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
    with _HTTP_SESSION_LOCK:
        _HTTP_SESSIONS.add(session)
    _HTTP_THREAD_LOCAL.session = session
    return session


def close_all_sessions() -> None:
    """Close pooled HTTP sessions at shutdown."""

    with _HTTP_SESSION_LOCK:
        sessions: Sequence[Session] = tuple(_HTTP_SESSIONS)
        _HTTP_SESSIONS.clear()
    for session in sessions:
        try:
            session.close()
        except Exception:  # pragma: no cover - close errors at shutdown
            continue


atexit.register(close_all_sessions)


__all__ = ["get_http_session", "set_retry_statuses", "close_all_sessions"]
