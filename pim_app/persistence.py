from __future__ import annotations

import json
import logging
import sqlite3
import time
from pathlib import Path
from typing import Callable, Sequence

from .errors import PersistenceError
from .models import Part, part_from_dict
from .storage import KeyValueStore, SqliteKeyValueStore


logger = logging.getLogger(__name__)

STORAGE_KEY = "parts-inventory"
MAX_AGE_MS = 24 * 60 * 60 * 1000


def now_ms() -> int:
    return int(time.time() * 1000)


def filter_valid_parts(records: Sequence[object]) -> list[Part]:
    parts: list[Part] = []
    for raw in records:
        part = part_from_dict(raw)
        if part is not None:
            parts.append(part)
    dropped = len(records) - len(parts)
    if dropped:
        logger.warning("Dropped %d invalid stored part record(s)", dropped)
    return parts


def encode_parts(parts: Sequence[Part], timestamp: int) -> str:
    return json.dumps({"parts": [part.to_dict() for part in parts], "timestamp": timestamp})


class PartsRepository:
    """Reads and writes the whole inventory under one storage key.

    Two stored shapes are understood: a bare list of parts (legacy) and the
    envelope ``{"parts": [...], "timestamp": <ms>}`` that :meth:`save` writes.
    Envelopes older than 24 hours are discarded on load.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = STORAGE_KEY,
        clock: Callable[[], int] = now_ms,
        max_age_ms: int = MAX_AGE_MS,
    ) -> None:
        self.store = store
        self.key = key
        self.clock = clock
        self.max_age_ms = max_age_ms

    def _discard(self, reason: str) -> None:
        logger.warning("Discarding stored inventory (%s)", reason)
        try:
            self.store.remove_item(self.key)
        except (sqlite3.Error, OSError):
            logger.exception("Could not remove stored inventory")

    def _is_expired(self, timestamp: object) -> bool:
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)) or not timestamp:
            return False
        return (self.clock() - timestamp) > self.max_age_ms

    def load(self) -> list[Part]:
        try:
            stored = self.store.get_item(self.key)
        except (sqlite3.Error, OSError):
            logger.exception("Could not read stored inventory")
            return []
        if not stored:
            return []
        try:
            data = json.loads(stored)
        except (ValueError, TypeError):
            self._discard("corrupted data")
            return []
        if isinstance(data, list):
            return filter_valid_parts(data)
        if isinstance(data, dict) and isinstance(data.get("parts"), list):
            if self._is_expired(data.get("timestamp")):
                self._discard("expired")
                return []
            return filter_valid_parts(data["parts"])
        return []

    def save(self, parts: Sequence[Part]) -> None:
        if not isinstance(parts, (list, tuple)):
            raise PersistenceError("Parts must be a list")
        if not all(isinstance(part, Part) for part in parts):
            raise PersistenceError("Parts must only contain Part records")
        serialized = encode_parts(parts, self.clock())
        try:
            self.store.set_item(self.key, serialized)
        except (sqlite3.Error, OSError) as exc:
            raise PersistenceError(f"Could not write inventory: {exc}") from exc
        logger.info("Saved %d part(s) to %s", len(parts), self.key)

    def delete(self, part_id: str) -> None:
        try:
            stored = self.store.get_item(self.key)
        except (sqlite3.Error, OSError) as exc:
            raise PersistenceError(f"Could not read inventory: {exc}") from exc
        if not stored:
            raise PersistenceError("No parts in inventory")
        try:
            data = json.loads(stored)
        except (ValueError, TypeError) as exc:
            raise PersistenceError("Stored inventory is unreadable") from exc
        timestamp: object = None
        if isinstance(data, dict) and isinstance(data.get("parts"), list):
            timestamp = data.get("timestamp")
            records = data["parts"]
        elif isinstance(data, list):
            records = data
        else:
            raise PersistenceError("Stored inventory is unreadable")
        remaining = [part for part in filter_valid_parts(records) if part.id != part_id]
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            timestamp = self.clock()
        try:
            self.store.set_item(self.key, encode_parts(remaining, int(timestamp)))
        except (sqlite3.Error, OSError) as exc:
            raise PersistenceError(f"Could not write inventory: {exc}") from exc
        logger.info("Deleted stored part %s", part_id)


def open_repository(storage_path: str | Path) -> PartsRepository:
    return PartsRepository(SqliteKeyValueStore(Path(storage_path)))
