"""Server status lookups with a persistent cache and stale fallback."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from game_monitor.adapters.game_monitor_client import GameMonitorClient
from game_monitor.adapters.json_store_repository import StoreRepository
from game_monitor.adapters.server_xml import parse_server_xml
from game_monitor.app_logging import DebugLog, NullDebugLog
from game_monitor.domain.lookup import CacheState, LookupSource, ServerLookup
from game_monitor.domain.models import ServerRecord, cache_key
from game_monitor.errors import PersistFailure, TransportFailure
from game_monitor.services.freshness import FreshnessPolicy, needs_fetch
from game_monitor.services.reshape import reshape_server_info

_logger = logging.getLogger(__name__)


@dataclass
class ServerInfoService:
    """Serves server records from the store, refreshing them when stale.

    A failed fetch never loses data: whatever the store holds for the key is
    returned instead, however old it is.
    """

    client: GameMonitorClient
    store: StoreRepository
    policy: FreshnessPolicy
    debug_log: DebugLog = field(default_factory=NullDebugLog)
    clock: Callable[[], float] = time.time

    def lookup(self, host: str | None, port: str | int | None) -> ServerLookup | None:
        """Return the record for ``host:port`` and how it was obtained."""
        if not host or not port:
            return None

        key = cache_key(host, port)
        cached = self.store.get(key)
        now = self.clock()
        state = self.policy.evaluate(cached, now)

        if not needs_fetch(state):
            self.debug_log.emit(3, "Store data is fresh.  Returning store data.")
            return ServerLookup(record=cached, state=state, source=LookupSource.CACHE)
        if state is CacheState.MISS:
            self.debug_log.emit(
                3, "There is no store data for this host/ip.  Fetching from source."
            )
        else:
            self.debug_log.emit(
                2, f"Store is not fresh enough ({state.value}).  Fetching from source."
            )

        try:
            record = self._fetch(host, port, now)
        except TransportFailure as exc:
            self.debug_log.emit(2, "Could not fetch data from source.", str(exc))
            if cached is None:
                self.debug_log.emit(3, "There is no store data to return.")
                return None
            self.debug_log.emit(
                2, "Going to provide stale store data instead of failing."
            )
            return ServerLookup(
                record=cached,
                state=CacheState.FALLBACK_STALE,
                source=LookupSource.FALLBACK,
            )

        try:
            self.store.put(key, record)
        except PersistFailure as exc:
            _logger.warning("Could not save server info for %s: %s", key, exc)
            self.debug_log.emit(2, f"Could not save store data: {exc}")
        return ServerLookup(record=record, state=state, source=LookupSource.REMOTE)

    def get_server_info(
        self, host: str | None, port: str | int | None
    ) -> ServerRecord | None:
        """Return just the record for ``host:port``, or ``None``."""
        result = self.lookup(host, port)
        return result.record if result else None

    def _fetch(self, host: str, port: str | int, now: float) -> ServerRecord:
        body = self.client.fetch_server_xml(host, port)
        raw = parse_server_xml(body)
        return reshape_server_info(
            raw,
            host=host,
            port=port,
            updated=now,
            client_version=self.policy.client_version,
        )
