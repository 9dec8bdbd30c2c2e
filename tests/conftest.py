"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from game_monitor.adapters.game_monitor_client import GameMonitorClient
from game_monitor.adapters.json_store_repository import StoreRepository
from game_monitor.app_logging import DebugLog
from game_monitor.domain.models import PlayerCount, ServerRecord
from game_monitor.errors import TransportFailure
from game_monitor.services.freshness import FreshnessPolicy
from game_monitor.services.server_info import ServerInfoService

CLIENT_VERSION = "0.2.0"
NOW = 1_700_000_000.0

TWO_PLAYER_XML = """<?xml version="1.0" encoding="UTF-8"?>
<server>
  <ip>1.2.3.4</ip>
  <port>9999</port>
  <name>ACE Battlefield2 Server</name>
  <map>Strike at Karkand</map>
  <game>
    <name>bf2</name>
    <longname>Battlefield 2</longname>
  </game>
  <players current="2" max="64">
    <player name="Alice" score="12" ping="40"/>
    <player name="Bob" score="7" ping="55"/>
  </players>
  <variables>
    <variable name="gamemode" value="gpm_cq"/>
    <variable name="mapsize" value="64"/>
    <variable name="password" value="0"/>
  </variables>
</server>
"""

ONE_PLAYER_XML = """<server>
  <ip>5.6.7.8</ip>
  <port>1111</port>
  <name>Solo</name>
  <map>dm1</map>
  <players current="1" max="8"><player name="Carol"/></players>
  <variables><variable name="fraglimit" value="20"/></variables>
</server>
"""

EMPTY_SERVER_XML = """<server>
  <ip>5.6.7.8</ip>
  <port>1111</port>
  <name>Empty</name>
  <map>dm2</map>
  <players current="0" max="8"/>
  <variables/>
</server>
"""


@dataclass
class FakeGameMonitorClient(GameMonitorClient):
    """Fake client returning a fixed body, or failing when told to."""

    body: str = TWO_PLAYER_XML
    fail: bool = False
    calls: list[tuple[str, str | int]] = field(default_factory=list)
    closed: bool = False

    def fetch_server_xml(self, host: str, port: str | int) -> bytes:
        self.calls.append((host, port))
        if self.fail:
            raise TransportFailure("connection refused")
        return self.body.encode("utf-8")

    def close(self) -> None:
        self.closed = True


@dataclass
class InMemoryStoreRepository(StoreRepository):
    """In-memory store that records every write."""

    records: dict[str, ServerRecord] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def load(self) -> dict[str, ServerRecord]:
        return dict(self.records)

    def get(self, key: str) -> ServerRecord | None:
        return self.records.get(key)

    def put(self, key: str, record: ServerRecord) -> None:
        self.records[key] = record
        self.writes.append(key)


@dataclass
class RecordingDebugLog(DebugLog):
    """Debug log that keeps messages in memory."""

    entries: list[tuple[int, str]] = field(default_factory=list)

    def emit(self, level: int, *messages: str) -> None:
        for message in messages:
            self.entries.append((level, message))

    def close(self) -> None:
        return None


def make_record(
    ip: str = "1.2.3.4",
    port: int = 9999,
    updated: float = NOW,
    client_version: str = CLIENT_VERSION,
) -> ServerRecord:
    return ServerRecord(
        ip=ip,
        port=port,
        name="Cached Server",
        map="Old Map",
        count=PlayerCount(current=1, max=16),
        players=[{"name": "Dave"}],
        variables={"gamemode": "ctf"},
        updated=updated,
        client_version=client_version,
    )


@pytest.fixture
def game_monitor_client() -> FakeGameMonitorClient:
    return FakeGameMonitorClient()


@pytest.fixture
def store() -> InMemoryStoreRepository:
    return InMemoryStoreRepository()


@pytest.fixture
def service(
    game_monitor_client: FakeGameMonitorClient, store: InMemoryStoreRepository
) -> ServerInfoService:
    return ServerInfoService(
        client=game_monitor_client,
        store=store,
        policy=FreshnessPolicy(ttl_seconds=600, client_version=CLIENT_VERSION),
        debug_log=RecordingDebugLog(),
        clock=lambda: NOW,
    )
