"""Client configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from game_monitor._version import __version__

DEFAULT_FRESH_SECONDS = 600
DEFAULT_STORE_FILE = "gameServerInfoCache.json"
DEFAULT_DEBUG_LOG = "gmDebug.log"
DEFAULT_BASE_URL = "http://www.game-monitor.com"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    host: str | None = None
    port: str | None = None
    fresh_seconds: int = DEFAULT_FRESH_SECONDS
    store_file: str = DEFAULT_STORE_FILE
    debug_log: str = DEFAULT_DEBUG_LOG
    debug_level: int = 0
    base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 15.0
    client_version: str = __version__

    model_config = SettingsConfigDict(
        env_prefix="GAME_MONITOR_",
        env_file=".env",
        extra="ignore",
    )
