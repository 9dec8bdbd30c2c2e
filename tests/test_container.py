"""Tests for container wiring."""

from game_monitor.adapters.game_monitor_client import HttpxGameMonitorClient
from game_monitor.app_logging import NullDebugLog
from game_monitor.config import Settings
from game_monitor.containers import build_container


def test_build_container_creates_services(tmp_path) -> None:
    settings = Settings(store_file=str(tmp_path / "cache.json"), fresh_seconds=120)

    container = build_container(settings)

    assert isinstance(container.game_monitor_client, HttpxGameMonitorClient)
    assert isinstance(container.debug_log, NullDebugLog)
    assert container.server_info_service.policy.ttl_seconds == 120
    assert container.server_info_service.policy.client_version == (
        settings.client_version
    )
    container.close_resources()
