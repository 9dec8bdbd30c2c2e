"""Game-Monitor.com server-xml API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from game_monitor.errors import TransportFailure


class GameMonitorClient(Protocol):
    """Interface for fetching raw server status documents."""

    def fetch_server_xml(self, host: str, port: str | int) -> bytes:
        """Return the raw XML body describing a server."""

    def close(self) -> None:
        """Release the underlying HTTP session."""


@dataclass
class HttpxGameMonitorClient(GameMonitorClient):
    """HTTPX-backed Game-Monitor client."""

    base_url: str
    http_client: httpx.Client
    timeout: float = 15.0

    @classmethod
    def create(cls, base_url: str, timeout: float = 15.0) -> "HttpxGameMonitorClient":
        """Create a client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.Client(), timeout=timeout)

    def server_xml_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/client/server-xml.php"

    def fetch_server_xml(self, host: str, port: str | int) -> bytes:
        """Fetch the status document, with server rules, for ``host:port``.

        The body is returned undecoded so the XML declaration picks the encoding.
        """
        url = self.server_xml_url()
        try:
            response = self.http_client.get(
                url,
                params={"rules": 1, "ip": f"{host}:{port}"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise TransportFailure(
                f"Request for {host}:{port} failed: {exc}", url
            ) from exc
        if not response.content.strip():
            raise TransportFailure(f"Empty response for {host}:{port}", url)
        return response.content

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
