from __future__ import annotations

import logging
import threading
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class LyricsCache:
    """Source URL -> decoded lyrics. Keys are used verbatim."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def put(self, key: str, value: str) -> None:
        raise NotImplementedError

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __len__(self) -> int:
        raise NotImplementedError


class MemoryLyricsCache(LyricsCache):
    """Unbounded process-lifetime store. No eviction, no expiry."""

    def __init__(self):
        self._entries: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: str) -> None:
        with self._lock:
            self._entries[key] = value
            size = len(self._entries)
        logger.debug("Cached lyrics for %s (%d entries)", key, size)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
