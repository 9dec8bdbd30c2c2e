"""Lookup outcome models."""

from dataclasses import dataclass
from enum import Enum

from game_monitor.domain.models import ServerRecord


class CacheState(Enum):
    """Freshness of the cached record for a key."""

    MISS = "miss"
    FRESH = "fresh"
    STALE_AGE = "stale_age"
    STALE_VERSION = "stale_version"
    FALLBACK_STALE = "fallback_stale"


class LookupSource(Enum):
    """Where the returned record came from."""

    CACHE = "cache"
    REMOTE = "remote"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ServerLookup:
    """A record together with how it was obtained."""

    record: ServerRecord
    state: CacheState
    source: LookupSource

    @property
    def is_stale(self) -> bool:
        return self.source is LookupSource.FALLBACK
