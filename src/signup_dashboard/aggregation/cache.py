"""Time-to-live cache for the signup summary.

SummaryService owns a single cache slot. A summary younger than the
freshness window is returned as-is; otherwise the row source is fetched
again and the slot is overwritten.

Cache states:
- EMPTY: nothing computed yet
- FRESH: entry younger than the TTL
- STALE: entry at or past the TTL, recomputed on the next request

A failed recompute leaves the slot untouched, so a STALE entry stays
STALE. By default the failure propagates; with serve_stale_on_error the
stale summary is returned instead.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from datetime import datetime, timezone

from signup_dashboard.aggregation.summary import summarize_rows
from signup_dashboard.models.domain import CacheEntry, CacheState
from signup_dashboard.models.types import Summary
from signup_dashboard.sources.base import RowSourceBase, RowSourceError

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 60.0


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SummaryService:
    """Serves the current summary with at most one fetch per window.

    Recomputes are serialized by a lock: concurrent requests that all
    find the slot stale wait for the first one and reuse its result.
    """

    def __init__(
        self,
        source: RowSourceBase,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        *,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = _utcnow,
        serve_stale_on_error: bool = False,
    ):
        """Initialize the service.

        Args:
            source: Row source to read the sheet from.
            ttl_seconds: Freshness window.
            clock: Monotonic seconds, used for freshness checks.
            now: Wall clock, used for Summary.updated_at.
            serve_stale_on_error: Return the stale summary when a
                recompute fails instead of raising.
        """
        if ttl_seconds < 0:
            raise ValueError("ttl_seconds must be >= 0")
        self.source = source
        self.ttl_seconds = ttl_seconds
        self.serve_stale_on_error = serve_stale_on_error
        self._clock = clock
        self._now = now
        self._entry: CacheEntry | None = None
        self._lock = threading.Lock()

    @property
    def entry(self) -> CacheEntry | None:
        """Current cache slot, None before the first successful compute."""
        return self._entry

    def _is_fresh(self, entry: CacheEntry, at: float) -> bool:
        return at - entry.fetched_at < self.ttl_seconds

    def cache_state(self) -> CacheState:
        entry = self._entry
        if entry is None:
            return "EMPTY"
        return "FRESH" if self._is_fresh(entry, self._clock()) else "STALE"

    def get_summary(self) -> Summary:
        """Return the current summary, recomputing it when stale.

        Raises:
            RowSourceError: If the sheet cannot be read (unless a stale
                summary is served instead).
        """
        entry = self._entry
        if entry is not None and self._is_fresh(entry, self._clock()):
            logger.debug("Serving cached summary from %s", entry.summary.updated_at)
            return entry.summary

        with self._lock:
            # Another request may have refreshed the slot while we waited
            entry = self._entry
            started = self._clock()
            if entry is not None and self._is_fresh(entry, started):
                return entry.summary

            return self._recompute(entry, started)

    def _recompute(self, previous: CacheEntry | None, started: float) -> Summary:
        logger.info("Summary cache %s, fetching rows", "stale" if previous else "empty")
        try:
            rows = self.source.fetch_rows()
        except RowSourceError:
            if self.serve_stale_on_error and previous is not None:
                logger.warning(
                    "Row fetch failed, serving stale summary from %s",
                    previous.summary.updated_at,
                    exc_info=True,
                )
                return previous.summary
            raise

        summary = summarize_rows(rows, now=self._now())
        self._entry = CacheEntry(summary=summary, fetched_at=started)
        logger.info(
            "Summary computed: %d rows fetched, %d signups, %d countries",
            len(rows),
            summary.total,
            len(summary.countries),
        )
        return summary
