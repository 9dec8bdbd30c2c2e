"""Cache freshness policy."""

from dataclasses import dataclass

from game_monitor.domain.lookup import CacheState
from game_monitor.domain.models import ServerRecord


@dataclass(frozen=True)
class FreshnessPolicy:
    """Decides whether a cached record can be served without a fetch."""

    ttl_seconds: int
    client_version: str

    def evaluate(self, record: ServerRecord | None, now: float) -> CacheState:
        """Classify a cached record against the TTL and client version."""
        if record is None:
            return CacheState.MISS
        # A version mismatch invalidates the record regardless of age.
        if record.client_version != self.client_version:
            return CacheState.STALE_VERSION
        if now - record.updated <= self.ttl_seconds:
            return CacheState.FRESH
        return CacheState.STALE_AGE


def needs_fetch(state: CacheState) -> bool:
    return state is not CacheState.FRESH
