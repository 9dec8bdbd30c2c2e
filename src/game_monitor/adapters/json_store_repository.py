"""JSON file-backed store for server records."""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Protocol

from pydantic import ValidationError

from game_monitor.domain.models import ServerRecord
from game_monitor.errors import CacheUnavailable, PersistFailure

_logger = logging.getLogger(__name__)


class StoreRepository(Protocol):
    """Persistence interface for cached server records."""

    def load(self) -> dict[str, ServerRecord]:
        """Return every persisted record, or an empty mapping."""

    def get(self, key: str) -> ServerRecord | None:
        """Return the record stored under ``key``, if present."""

    def put(self, key: str, record: ServerRecord) -> None:
        """Store ``record`` under ``key`` and persist the whole store."""


@dataclass
class JsonFileStoreRepository(StoreRepository):
    """Store persisted as a single JSON document.

    The document is read once, at construction, and rewritten in full after
    every ``put`` through a temporary file so a failed write never leaves a
    truncated cache behind.
    """

    path: str
    _records: dict[str, ServerRecord] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._records = self.load()

    def load(self) -> dict[str, ServerRecord]:
        """Read the persisted document; any failure yields an empty mapping."""
        try:
            payload = self._read()
        except CacheUnavailable as exc:
            _logger.info("Starting with an empty store: %s", exc)
            return {}

        records: dict[str, ServerRecord] = {}
        for key, raw in payload.items():
            try:
                records[key] = ServerRecord.model_validate(raw)
            except ValidationError as exc:
                _logger.warning("Skipping unreadable store entry %s: %s", key, exc)
        return records

    def get(self, key: str) -> ServerRecord | None:
        return self._records.get(key)

    def put(self, key: str, record: ServerRecord) -> None:
        """Insert the record and atomically rewrite the store file."""
        self._records[key] = record

        serialized = self._serialize()
        if not serialized:
            _logger.warning("Store serialized to nothing; keeping %s", self.path)
            return
        self._write(serialized)

    def _serialize(self) -> str:
        try:
            return json.dumps(
                {
                    name: value.model_dump(mode="json")
                    for name, value in self._records.items()
                },
                ensure_ascii=False,
                indent=2,
            )
        except (TypeError, ValueError) as exc:
            raise PersistFailure(f"Could not serialize store: {exc}") from exc

    def _read(self) -> dict[str, object]:
        try:
            with open(self.path, encoding="utf-8") as fh:
                payload = json.load(fh)
        except FileNotFoundError as exc:
            raise CacheUnavailable(f"{self.path} does not exist") from exc
        except (OSError, ValueError) as exc:
            raise CacheUnavailable(f"{self.path} is unreadable: {exc}") from exc
        if not isinstance(payload, dict):
            raise CacheUnavailable(f"{self.path} does not hold a mapping")
        return payload

    def _write(self, serialized: str) -> None:
        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as fh:
                fh.write(serialized)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, self.path)
        except OSError as exc:
            try:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
            except OSError:
                _logger.warning("Could not remove temporary store file %s", tmp_path)
            raise PersistFailure(f"Could not write {self.path}: {exc}") from exc
