"""Process-lifetime cache of decoded SWAPI payloads keyed by resource path."""

import threading
from typing import Any, Optional


class ResponseCache:
    """Unbounded path -> payload mapping; entries are never evicted or expired."""

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, path: str, default: Optional[Any] = None) -> Optional[Any]:
        """Return the cached payload for an exact path (query string included)."""
        with self._lock:
            return self._entries.get(path, default)

    def put(self, path: str, payload: Any) -> None:
        """Store a payload; a second put for the same path replaces the first."""
        with self._lock:
            self._entries[path] = payload

    def size(self) -> int:
        """Number of distinct paths cached."""
        with self._lock:
            return len(self._entries)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return path in self._entries

    def __len__(self) -> int:
        return self.size()
