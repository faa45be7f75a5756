"""Caller-owned memoization of participant classifications.

The engine holds no state between calls. Callers that recompute the same
participant/instant pairs (for example across consecutive renders) can
create a ClassificationCache and pass it in explicitly. Entries are keyed by
participant id, candidate UTC instant and a caller-supplied config version;
bumping the version is the only invalidation mechanism.
"""

import threading
from datetime import datetime

from loguru import logger

from meeting_equity.scheduling.types import ParticipantStatus

CacheKey = tuple[str, datetime, str]


class ClassificationCache:
    """Thread-safe keyed store of ParticipantStatus values."""

    def __init__(self) -> None:
        self._entries: dict[CacheKey, ParticipantStatus] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @staticmethod
    def key(participant_id: str, utc_instant: datetime, config_version: str) -> CacheKey:
        return (participant_id, utc_instant, config_version)

    def get(self, participant_id: str, utc_instant: datetime, config_version: str) -> ParticipantStatus | None:
        """Get a cached status, or None on a miss."""
        cache_key = self.key(participant_id, utc_instant, config_version)
        with self._lock:
            cached = self._entries.get(cache_key)
            if cached is None:
                self.misses += 1
            else:
                self.hits += 1
        return cached

    def set(self, participant_id: str, utc_instant: datetime, config_version: str, status: ParticipantStatus) -> None:
        cache_key = self.key(participant_id, utc_instant, config_version)
        with self._lock:
            self._entries[cache_key] = status

    def clear(self) -> None:
        """Drop every entry and reset hit/miss counters."""
        with self._lock:
            size = len(self._entries)
            self._entries.clear()
            self.hits = 0
            self.misses = 0
        logger.debug("classification_cache: Cache cleared", entries=size)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
