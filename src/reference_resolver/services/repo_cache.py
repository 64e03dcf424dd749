"""In-memory repository result cache with a time-to-live check on read."""

from __future__ import annotations

import logging
import time
from typing import Callable

from reference_resolver.domain.entities import CachedResult

logger = logging.getLogger(__name__)


class RepoCache:
    """Maps ``"owner/repo"`` to the last successful :class:`CachedResult`.

    Expiry is lazy: a stale entry stays in the map until it is overwritten by
    a fresh fetch, removed by :meth:`purge_expired`, or the cache is cleared.
    Stale entries are never returned.  Access is expected from a single event
    loop; callers adding worker threads must add their own locking.
    """

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CachedResult] = {}

    def now(self) -> float:
        return self._clock()

    def get(self, key: str) -> CachedResult | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.timestamp >= self._ttl:
            return None
        return entry

    def put(self, key: str, result: CachedResult) -> None:
        self._entries[key] = result

    def clear(self) -> None:
        """Drop every cached repository (admin / testing hook)."""
        self._entries.clear()
        logger.info("Repository cache cleared")

    def purge_expired(self) -> int:
        """Remove stale entries and return how many were dropped."""
        now = self._clock()
        stale = [k for k, v in self._entries.items() if now - v.timestamp >= self._ttl]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
