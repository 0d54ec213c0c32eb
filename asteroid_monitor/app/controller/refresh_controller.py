"""Refresh controller: encapsulates the asteroid acquisition lifecycle.

Updates: v0.1 - 2026-10-12 - Single-flight acquisition chain with coalesced
refresh requests.
Updates: v0.2 - 2026-10-19 - Chains are tagged with a generation so advisories from
a superseded chain are dropped.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import TYPE_CHECKING, Callable, List, Optional

from ...acquisition import FeedAcquirer
from ...models import AcquisitionResult, FeedTier, NearEarthObject
from ...normalize import normalize_feed

if TYPE_CHECKING:
    # Forward declaration to avoid runtime circular import
    from ...application import AsteroidMonitorApp


logger = logging.getLogger(__name__)

Runner = Callable[[Callable[[], None]], None]


def run_in_daemon_thread(work: Callable[[], None]) -> None:
    threading.Thread(target=work, name="asteroid-refresh", daemon=True).start()


class RefreshController:
    """Run at most one acquisition chain and hand results to the UI thread.

    Responsibilities:
    - Show the loading indicator while a chain is in flight.
    - Run the tiered acquisition and normalization off the UI thread.
    - Relay degraded-tier advisories as they happen.
    - Coalesce refreshes requested mid-flight into one follow-up chain and
      discard the superseded result, so two chains never race to replace the
      collection.
    """

    def __init__(
        self,
        app: "AsteroidMonitorApp",
        acquirer: FeedAcquirer,
        *,
        runner: Optional[Runner] = None,
    ) -> None:
        """Bind the controller to the host app and its acquirer."""
        self.app = app
        self.acquirer = acquirer
        self._runner: Runner = runner or run_in_daemon_thread
        self._in_flight = False
        self._pending = False
        self._generation = 0

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def refresh(self) -> None:
        """Start a chain, or queue one behind the chain already running."""
        if self._in_flight:
            if not self._pending:
                logger.info("Refresh requested while a fetch is running; queued.")
            self._pending = True
            return
        self._start()

    def _start(self) -> None:
        self._in_flight = True
        self._generation += 1
        generation = self._generation
        self.app.set_loading(True)
        self._runner(lambda: self._worker(generation))

    def _worker(self, generation: int) -> None:
        """Run the acquisition chain, then callback on the UI thread."""
        try:
            result = asyncio.run(
                self.acquirer.acquire(
                    on_tier_change=lambda tier: self._report_tier(generation, tier)
                )
            )
            objects = normalize_feed(result.payload)
        except Exception as exc:
            logger.exception("Asteroid acquisition failed unexpectedly:")
            failure = exc
            self.app.after(0, lambda: self._handle_error(failure))
            return
        self.app.after(0, lambda: self._handle_result(result, objects))

    def _report_tier(self, generation: int, tier: FeedTier) -> None:
        self.app.after(0, lambda: self._announce_tier(generation, tier))

    def _announce_tier(self, generation: int, tier: FeedTier) -> None:
        # Only the newest chain may touch the banner, and only if nothing is queued behind it.
        if generation != self._generation or self._pending:
            logger.debug("Dropped %s advisory from a superseded refresh.", tier.value)
            return
        self.app.show_tier_advisory(tier)

    def _resume_pending(self) -> bool:
        if not self._pending:
            return False
        self._pending = False
        self._start()
        return True

    def _handle_result(
        self, result: AcquisitionResult, objects: List[NearEarthObject]
    ) -> None:
        self._in_flight = False
        if self._resume_pending():
            logger.info(
                "Discarded %s tier result superseded by a newer refresh.", result.tier.value
            )
            return
        self.app.apply_acquisition(result, objects)

    def _handle_error(self, exc: Exception) -> None:
        self._in_flight = False
        if self._resume_pending():
            return
        self.app.handle_fetch_error(exc)


__all__ = ["RefreshController", "run_in_daemon_thread"]
