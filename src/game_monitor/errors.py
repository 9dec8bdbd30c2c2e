"""Client error taxonomy.

None of these reach callers of the public facade: the service and the
facade resolve them to a record, a stale record, or ``None``.
"""


class GameMonitorError(Exception):
    """Base exception for client errors."""


class ConfigError(GameMonitorError):
    """Host or port could not be resolved for a query."""


class TransportFailure(GameMonitorError):
    """The remote request failed or returned an empty body."""

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(message)


class ResponseFormatError(TransportFailure):
    """The remote body was not well-formed XML."""


class CacheUnavailable(GameMonitorError):
    """The persisted cache file is missing or unparsable."""


class PersistFailure(GameMonitorError):
    """The cache file could not be rewritten."""
