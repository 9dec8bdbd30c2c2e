"""Logging configuration helpers and the verbosity-gated debug log."""

import logging
import re
from dataclasses import dataclass, field
from typing import Protocol

_LINE_SPLIT = re.compile(r"\r?\n")


def configure_logging() -> None:
    """Configure package logging with a single stream handler."""
    logger = logging.getLogger("game_monitor")
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


class DebugLog(Protocol):
    """Diagnostic sink gated by a numeric verbosity level."""

    def emit(self, level: int, *messages: str) -> None:
        """Record messages if the configured verbosity reaches ``level``."""

    def close(self) -> None:
        """Release any underlying resources."""


class NullDebugLog(DebugLog):
    """Debug log that discards everything."""

    def emit(self, level: int, *messages: str) -> None:
        return None

    def close(self) -> None:
        return None


@dataclass
class FileDebugLog(DebugLog):
    """Append-only debug log file.

    Every line of every message becomes its own ``[timestamp] line`` entry.
    The file is only opened once something is actually written, so a
    verbosity of zero never creates it.
    """

    path: str
    level: int = 0
    _handler: logging.FileHandler | None = field(default=None, init=False, repr=False)

    def enabled_for(self, level: int) -> bool:
        return self.level > 0 and self.level >= level

    def emit(self, level: int, *messages: str) -> None:
        """Append messages to the log file when verbose enough."""
        if not self.path or not self.enabled_for(level):
            return
        handler = self._get_handler()
        for message in messages:
            for line in _LINE_SPLIT.split(str(message)):
                record = logging.makeLogRecord(
                    {
                        "name": "game_monitor.debug",
                        "levelno": logging.DEBUG,
                        "levelname": "DEBUG",
                        "msg": line,
                    }
                )
                handler.handle(record)

    def close(self) -> None:
        if self._handler is not None:
            self._handler.close()
            self._handler = None

    def _get_handler(self) -> logging.FileHandler:
        if self._handler is None:
            handler = logging.FileHandler(
                self.path, mode="a", encoding="utf-8", delay=True
            )
            handler.setFormatter(logging.Formatter("[%(asctime)s] %(message)s"))
            self._handler = handler
        return self._handler


def build_debug_log(path: str | None, level: int) -> DebugLog:
    """Return a file debug log, or a null one when logging is off."""
    if not path or level <= 0:
        return NullDebugLog()
    return FileDebugLog(path=path, level=level)
