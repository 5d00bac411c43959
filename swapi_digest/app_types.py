"""Shared dataclasses passed between the fetch client and the orchestrator."""

from dataclasses import dataclass, field
from typing import List, Optional

from swapi_digest.cache import ResponseCache
from swapi_digest.config import Settings
from swapi_digest.metrics import Metrics, StatsSnapshot


@dataclass
class FetchContext:
    """Cache, counters and fetch settings owned by one orchestrator."""
    base_url: str
    timeout_ms: int
    debug: bool = True
    verify_tls: bool = True
    cache: ResponseCache = field(default_factory=ResponseCache)
    metrics: Metrics = field(default_factory=Metrics)

    @classmethod
    def from_settings(cls, settings: Settings) -> "FetchContext":
        return cls(
            base_url=settings.base_url,
            timeout_ms=settings.timeout_ms,
            debug=settings.debug,
            verify_tls=settings.verify_tls,
        )

    def snapshot(self) -> StatsSnapshot:
        return self.metrics.snapshot(
            cache_size=self.cache.size(),
            debug=self.debug,
            timeout_ms=self.timeout_ms,
        )


@dataclass
class RunResult:
    """Outcome of one orchestrator run."""
    ok: bool
    lines: List[str] = field(default_factory=list)
    error: Optional[str] = None
    vehicle_id: Optional[int] = None
