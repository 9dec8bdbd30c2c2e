"""Cached client for Game-Monitor.com server status."""

from game_monitor._version import __version__
from game_monitor.client import GameMonitor
from game_monitor.domain.lookup import CacheState, LookupSource, ServerLookup
from game_monitor.domain.models import PlayerCount, ServerRecord

__all__ = [
    "CacheState",
    "GameMonitor",
    "LookupSource",
    "PlayerCount",
    "ServerLookup",
    "ServerRecord",
    "__version__",
]
