"""Tiered feed acquisition: live NeoWs feed, static snapshot, emergency dataset.

The tiers run as an explicit state machine. Each tier either returns the
``near_earth_objects`` mapping or raises a :class:`FeedError`, which moves the
machine to the next tier. The emergency tier is an in-process literal and
cannot fail, so :meth:`FeedAcquirer.acquire` always returns a payload.

Blocking I/O (``requests`` and file reads) runs on daemon worker threads bridged
to an asyncio future; every tier has its own budget enforced with
``asyncio.wait_for`` so a slow live feed never eats into the snapshot budget.
A worker that outlives its budget is abandoned, never joined, so a hung request
cannot hold back the fallback result.

Updates: v0.1 - 2026-10-12 - Introduced tier state machine with per-tier budgets.
Updates: v0.2 - 2026-10-16 - Snapshot source may be a local file or an HTTP URL.
Updates: v0.3 - 2026-10-19 - Tier I/O moved off the default executor so timed-out
workers no longer delay the result.
"""

from __future__ import annotations

import asyncio
import json
import logging
import threading
from datetime import date
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

import requests

from .config import (
    FEED_WINDOW_DAYS,
    LIVE_FEED_TIMEOUT_SECONDS,
    SNAPSHOT_SOURCE,
    SNAPSHOT_TIMEOUT_SECONDS,
    resolve_api_key,
    resolve_feed_url,
)
from .emergency import build_emergency_payload
from .errors import FeedError, FeedTimeout, MalformedPayload, NetworkFailure
from .http_client import get_http_session
from .models import AcquisitionResult, FeedTier, RawPayload, RuntimeConfig, TierFailure
from .utils import trailing_window

logger = logging.getLogger(__name__)

TierCallback = Callable[[FeedTier], None]

_NEXT_TIER: Dict[FeedTier, FeedTier] = {
    FeedTier.LIVE: FeedTier.SNAPSHOT,
    FeedTier.SNAPSHOT: FeedTier.EMERGENCY,
    FeedTier.EMERGENCY: FeedTier.DONE,
}


def extract_neo_mapping(data: Any, *, require_entries: bool) -> Dict[str, Any]:
    """Return the ``near_earth_objects`` mapping of a decoded feed document."""

    if not isinstance(data, Mapping):
        raise MalformedPayload("payload is not a JSON object")
    mapping = data.get("near_earth_objects")
    if not isinstance(mapping, Mapping):
        raise MalformedPayload("payload has no near_earth_objects mapping")
    if require_entries and not mapping:
        raise MalformedPayload("near_earth_objects mapping is empty")
    return dict(mapping)


def _is_http_source(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


class FeedAcquirer:
    """Produce one RawPayload per call, degrading through the three tiers."""

    def __init__(
        self,
        runtime_config: Optional[RuntimeConfig] = None,
        *,
        session: Optional[requests.Session] = None,
        snapshot_source: Optional[str] = None,
        live_timeout: float = LIVE_FEED_TIMEOUT_SECONDS,
        snapshot_timeout: float = SNAPSHOT_TIMEOUT_SECONDS,
        emergency_loader: Callable[[], RawPayload] = build_emergency_payload,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.runtime_config = runtime_config
        self._session = session
        self.snapshot_source = snapshot_source or SNAPSHOT_SOURCE
        self.live_timeout = float(live_timeout)
        self.snapshot_timeout = float(snapshot_timeout)
        self._emergency_loader = emergency_loader
        self._today = today

    @property
    def feed_url(self) -> str:
        return resolve_feed_url(self.runtime_config)

    def build_feed_params(self) -> Dict[str, str]:
        """Query parameters for the trailing seven day window ending today."""
        start_date, end_date = trailing_window(self._today(), FEED_WINDOW_DAYS)
        return {
            "start_date": start_date,
            "end_date": end_date,
            "api_key": resolve_api_key(self.runtime_config),
        }

    async def acquire(self, on_tier_change: Optional[TierCallback] = None) -> AcquisitionResult:
        """Run the tiers strictly in order and return the first usable payload."""
        attempts: Dict[FeedTier, Callable[[], Awaitable[RawPayload]]] = {
            FeedTier.LIVE: self._attempt_live,
            FeedTier.SNAPSHOT: self._attempt_snapshot,
            FeedTier.EMERGENCY: self._attempt_emergency,
        }
        failures: List[TierFailure] = []
        tier = FeedTier.LIVE
        while tier is not FeedTier.DONE:
            if tier is not FeedTier.LIVE and on_tier_change is not None:
                on_tier_change(tier)
            logger.info("Acquiring asteroid data from %s tier", tier.value)
            try:
                payload = await attempts[tier]()
            except FeedError as exc:
                logger.warning("%s tier failed (%s): %s", tier.value, exc.kind, exc)
                failures.append(TierFailure(tier=tier, error_kind=exc.kind, message=str(exc)))
                tier = _NEXT_TIER[tier]
                continue
            logger.info(
                "Using %s tier payload with %d date bucket(s)", tier.value, len(payload)
            )
            return AcquisitionResult(payload=payload, tier=tier, failures=tuple(failures))
        raise RuntimeError("No data tier produced a payload")

    # Tiers

    async def _attempt_live(self) -> RawPayload:
        params = self.build_feed_params()
        logger.debug(
            "Requesting %s for %s..%s", self.feed_url, params["start_date"], params["end_date"]
        )
        data = await self._bounded(
            self._http_get_json,
            self.feed_url,
            params,
            self.live_timeout,
            budget=self.live_timeout,
            label="live feed",
        )
        return extract_neo_mapping(data, require_entries=True)

    async def _attempt_snapshot(self) -> RawPayload:
        source = self.snapshot_source
        if _is_http_source(source):
            data = await self._bounded(
                self._http_get_json,
                source,
                None,
                self.snapshot_timeout,
                budget=self.snapshot_timeout,
                label="snapshot",
            )
        else:
            data = await self._bounded(
                self._read_json_file,
                source,
                budget=self.snapshot_timeout,
                label="snapshot",
            )
        return extract_neo_mapping(data, require_entries=False)

    async def _attempt_emergency(self) -> RawPayload:
        return self._emergency_loader()

    # I/O helpers

    async def _bounded(
        self, func: Callable[..., Any], *args: Any, budget: float, label: str
    ) -> Any:
        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()

        def _settle(setter: Callable[[Any], None], value: Any) -> None:
            if not future.done():
                setter(value)

        def _work() -> None:
            try:
                value = func(*args)
            except Exception as exc:
                outcome = (future.set_exception, exc)
            else:
                outcome = (future.set_result, value)
            try:
                loop.call_soon_threadsafe(_settle, *outcome)
            except RuntimeError:
                # Loop already closed: the tier timed out and its result is abandoned.
                logger.debug("Discarding late %s result", label)

        threading.Thread(target=_work, name=f"asteroid-{label}", daemon=True).start()
        try:
            return await asyncio.wait_for(future, timeout=budget)
        except asyncio.TimeoutError as exc:
            raise FeedTimeout(f"{label} exceeded its {budget:g}s budget") from exc

    def _http_get_json(
        self, url: str, params: Optional[Mapping[str, str]], timeout: float
    ) -> Any:
        session = self._session or get_http_session()
        try:
            response = session.get(url, params=params, timeout=timeout)
        except requests.Timeout as exc:
            raise FeedTimeout(f"request to {url} timed out") from exc
        except requests.RequestException as exc:
            raise NetworkFailure(f"request to {url} failed: {exc}") from exc
        if not 200 <= response.status_code < 300:
            raise NetworkFailure(f"{url} answered HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedPayload(f"{url} did not return JSON") from exc

    @staticmethod
    def _read_json_file(path: str) -> Any:
        try:
            with Path(path).open("r", encoding="utf-8") as handle:
                return json.load(handle)
        except OSError as exc:
            raise NetworkFailure(f"snapshot {path} unavailable: {exc}") from exc
        except ValueError as exc:
            raise MalformedPayload(f"snapshot {path} is not valid JSON") from exc


__all__ = ["FeedAcquirer", "TierCallback", "extract_neo_mapping"]
