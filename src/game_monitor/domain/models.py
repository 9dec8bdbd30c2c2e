"""Domain models for game server status."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9_]")


class PlayerCount(BaseModel):
    """Current and maximum player count for a server."""

    model_config = ConfigDict(extra="allow")

    current: int = 0
    max: int = 0


class Player(BaseModel):
    """A player currently on the server, with whatever fields were reported."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None


class ServerRecord(BaseModel):
    """Normalized status snapshot for one host/port pair.

    Fields the remote service reports beyond the ones declared here are kept
    as extras and survive a trip through the cache file.
    """

    model_config = ConfigDict(extra="allow")

    ip: str
    port: int
    name: str | None = None
    map: str | None = None
    game: dict[str, Any] = Field(default_factory=dict)
    count: PlayerCount = Field(default_factory=PlayerCount)
    players: list[Player] = Field(default_factory=list)
    variables: dict[str, str] = Field(default_factory=dict)
    updated: float = 0.0
    client_version: str = ""


def cache_key(host: str, port: str | int) -> str:
    """Return the file-safe store key for a host/port pair.

    ``1.2.3.4`` port ``9999`` becomes ``ip_1_2_3_4_9999``. Distinct hostnames
    that differ only in punctuation map to the same key.
    """
    return _UNSAFE_KEY_CHARS.sub("_", f"ip_{host}_{port}")
