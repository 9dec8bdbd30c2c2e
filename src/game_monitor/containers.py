"""Dependency container wiring for the client."""

import time
from collections.abc import Callable
from dataclasses import dataclass

from game_monitor.adapters.game_monitor_client import (
    GameMonitorClient,
    HttpxGameMonitorClient,
)
from game_monitor.adapters.json_store_repository import (
    JsonFileStoreRepository,
    StoreRepository,
)
from game_monitor.app_logging import DebugLog, build_debug_log
from game_monitor.config import Settings
from game_monitor.services.freshness import FreshnessPolicy
from game_monitor.services.server_info import ServerInfoService


@dataclass
class AppContainer:
    """Holds client-wide dependencies."""

    settings: Settings
    game_monitor_client: GameMonitorClient
    store: StoreRepository
    debug_log: DebugLog
    server_info_service: ServerInfoService
    close_resources: Callable[[], None]


def build_container(
    settings: Settings | None = None,
    *,
    game_monitor_client: GameMonitorClient | None = None,
    clock: Callable[[], float] = time.time,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    client = game_monitor_client or HttpxGameMonitorClient.create(
        base_url=resolved_settings.base_url,
        timeout=resolved_settings.request_timeout,
    )
    store = JsonFileStoreRepository(resolved_settings.store_file)
    debug_log = build_debug_log(
        resolved_settings.debug_log, resolved_settings.debug_level
    )
    policy = FreshnessPolicy(
        ttl_seconds=resolved_settings.fresh_seconds,
        client_version=resolved_settings.client_version,
    )
    server_info_service = ServerInfoService(
        client=client,
        store=store,
        policy=policy,
        debug_log=debug_log,
        clock=clock,
    )

    def close_resources() -> None:
        client.close()
        debug_log.close()

    return AppContainer(
        settings=resolved_settings,
        game_monitor_client=client,
        store=store,
        debug_log=debug_log,
        server_info_service=server_info_service,
        close_resources=close_resources,
    )
