"""Time-expiring cache for remotely fetched icon data.

Entries are stored as JSON text ``{"data": ..., "timestamp": ms}`` in a
key/value store. Expired entries are evicted on lookup. Storage errors
never reach the caller: a failed write simply means nothing is cached.
"""

import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Protocol
from urllib.parse import quote

log = logging.getLogger(__name__)

CACHE_PREFIX = "iconify_cache_"
CACHE_EXPIRY_SECONDS = 24 * 60 * 60


class KeyValueStore(Protocol):
    """Persistent text store used as cache backend."""

    def read(self, key: str) -> str | None: ...

    def write(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Dictionary backed store."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def read(self, key: str) -> str | None:
        return self._items.get(key)

    def write(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)


class FileStore:
    """Store that keeps one file per key inside a directory."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{quote(key, safe='')}.json"

    def read(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


def list_key(prefix: str) -> str:
    """Cache key for the icon-name list of a collection."""
    return f"{CACHE_PREFIX}list_{prefix}"


def icon_key(prefix: str, name: str) -> str:
    """Cache key for the markup of a single icon."""
    return f"{CACHE_PREFIX}{prefix}_{name}"


class ResourceCache:
    """Key/value cache whose entries expire after a fixed window.

    Args:
        store: Backend store; defaults to a fresh MemoryStore.
        expiry: Expiry window in seconds (default 24 hours).
        clock: Returns the current time in seconds.
    """

    def __init__(
        self,
        store: KeyValueStore | None = None,
        expiry: float = CACHE_EXPIRY_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self.store = store if store is not None else MemoryStore()
        self.expiry = expiry
        self.clock = clock

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    def get(self, key: str) -> Any | None:
        """Return the cached payload, or None if absent or expired."""
        try:
            raw = self.store.read(key)
            if raw is None:
                log.debug("Cache miss: %s", key)
                return None
            entry = json.loads(raw)
            timestamp = entry["timestamp"]
            data = entry["data"]
        except (OSError, ValueError, KeyError, TypeError) as e:
            log.debug("Ignoring unreadable cache entry %s: %s", key, e)
            return None

        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            log.debug("Evicting cache entry with invalid timestamp: %s", key)
            self._remove(key)
            return None

        if self._now_ms() - timestamp > self.expiry * 1000:
            log.debug("Cache entry expired: %s", key)
            self._remove(key)
            return None

        log.debug("Cache hit: %s", key)
        return data

    def put(self, key: str, payload: Any) -> None:
        """Store a payload, overwriting any existing entry."""
        try:
            raw = json.dumps({"data": payload, "timestamp": self._now_ms()})
            self.store.write(key, raw)
        except (OSError, TypeError, ValueError) as e:
            log.debug("Discarding cache write for %s: %s", key, e)

    def _remove(self, key: str) -> None:
        try:
            self.store.remove(key)
        except OSError as e:
            log.debug("Failed to evict cache entry %s: %s", key, e)
