"""Public entry point for querying game server status."""

import json
import logging
import time
from collections.abc import Callable

from game_monitor.adapters.game_monitor_client import GameMonitorClient
from game_monitor.config import Settings
from game_monitor.containers import AppContainer, build_container
from game_monitor.domain.lookup import ServerLookup
from game_monitor.domain.models import ServerRecord
from game_monitor.errors import ConfigError

_logger = logging.getLogger(__name__)


class GameMonitor:
    """Fetch information about game servers from Game-Monitor.com.

    The queried server must be listed as a premium server on the service.
    Results are cached in ``store_file`` and considered fresh for ``fresh``
    seconds; when the service cannot be reached, the last cached result is
    returned even if it is stale.

    Example::

        gm = GameMonitor(host="216.237.126.132", port="16567")
        server = gm.query()
        if server:
            print(server.name, server.count.current, server.count.max)

    Options left unset (or falsy) fall back to ``settings``, which in turn
    reads ``GAME_MONITOR_*`` environment variables.
    """

    def __init__(  # noqa: PLR0913
        self,
        host: str | None = None,
        port: str | int | None = None,
        fresh: int | None = None,
        store_file: str | None = None,
        debug_log: str | None = None,
        debug_level: int | None = None,
        *,
        settings: Settings | None = None,
        game_monitor_client: GameMonitorClient | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        overrides: dict[str, object] = {
            "host": host or None,
            "port": str(port) if port else None,
            "fresh_seconds": fresh or None,
            "store_file": store_file or None,
            "debug_log": debug_log or None,
            "debug_level": debug_level or None,
        }
        base = settings or Settings()
        resolved = base.model_copy(
            update={key: value for key, value in overrides.items() if value is not None}
        )
        self._container: AppContainer = build_container(
            resolved, game_monitor_client=game_monitor_client, clock=clock
        )
        self._container.debug_log.emit(
            7,
            "Object Attributes:",
            json.dumps(resolved.model_dump(), indent=2, sort_keys=True),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "GameMonitor":
        """Create a client configured entirely from settings."""
        return cls(settings=settings)

    @property
    def settings(self) -> Settings:
        return self._container.settings

    @property
    def host(self) -> str | None:
        return self.settings.host

    @property
    def port(self) -> str | None:
        return self.settings.port

    def lookup(
        self, host: str | None = None, port: str | int | None = None
    ) -> ServerLookup | None:
        """Return the server record along with where it came from."""
        try:
            resolved_host, resolved_port = self._resolve(host, port)
        except ConfigError as exc:
            _logger.warning("%s", exc)
            self._container.debug_log.emit(1, str(exc))
            return None
        return self._container.server_info_service.lookup(
            resolved_host, resolved_port
        )

    def query(
        self, host: str | None = None, port: str | int | None = None
    ) -> ServerRecord | None:
        """Return the status of a server, or ``None`` if nothing is available.

        ``host`` and ``port`` default to the values given at construction.
        """
        result = self.lookup(host, port)
        return result.record if result else None

    get_server_info = query

    def close(self) -> None:
        """Release the HTTP session and the debug log file."""
        self._container.close_resources()

    def __enter__(self) -> "GameMonitor":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _resolve(
        self, host: str | None, port: str | int | None
    ) -> tuple[str, str | int]:
        resolved_host = host or self.settings.host
        resolved_port = port or self.settings.port
        if not resolved_host or not resolved_port:
            raise ConfigError(
                "A host and a port are required, either per query or as defaults"
            )
        return resolved_host, resolved_port
