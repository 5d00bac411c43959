"""Process-wide counters for runs, errors and fetched payload size."""

import threading

from pydantic import BaseModel


class StatsSnapshot(BaseModel):
    """Point-in-time view of the counters, served as the /stats body."""
    api_calls: int
    cache_size: int
    data_size: int
    errors: int
    debug: bool
    timeout: int


class Metrics:
    """Additive counters plus the identifier of the next person/vehicle to fetch."""

    def __init__(self, start_id: int = 1) -> None:
        self._lock = threading.Lock()
        self._requests = 0
        self._errors = 0
        self._bytes = 0
        self._last_id = start_id

    @property
    def requests(self) -> int:
        return self._requests

    @property
    def errors(self) -> int:
        return self._errors

    @property
    def bytes(self) -> int:
        return self._bytes

    @property
    def last_id(self) -> int:
        return self._last_id

    def record_request(self) -> None:
        with self._lock:
            self._requests += 1

    def record_error(self) -> None:
        with self._lock:
            self._errors += 1

    def add_bytes(self, size: int) -> None:
        with self._lock:
            self._bytes += size

    def advance_last_id(self) -> int:
        """Move to the next identifier and return it."""
        with self._lock:
            self._last_id += 1
            return self._last_id

    def snapshot(self, *, cache_size: int, debug: bool, timeout_ms: int) -> StatsSnapshot:
        """Combine the counters with cache size and runtime settings for reporting."""
        with self._lock:
            return StatsSnapshot(
                api_calls=self._requests,
                cache_size=cache_size,
                data_size=self._bytes,
                errors=self._errors,
                debug=debug,
                timeout=timeout_ms,
            )
