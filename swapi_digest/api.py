"""HTTP routes that trigger a digest run and report counters."""

from fastapi import APIRouter, BackgroundTasks
from fastapi.responses import PlainTextResponse

from .config import Settings, settings
from .metrics import StatsSnapshot
from .orchestrator import Orchestrator
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="swapi_digest/api")

TRIGGER_ACK = "Check server console for results"


def build_orchestrator(cfg: Settings | None = None) -> Orchestrator:
    """Create the process-wide orchestrator from settings."""
    cfg = cfg or settings
    if not cfg.verify_tls:
        logger.warning("TLS certificate verification is disabled for upstream requests")
    return Orchestrator.from_settings(cfg)


router = APIRouter()
ORCHESTRATOR = build_orchestrator(settings)


def run_digest() -> None:
    """Background task body; failures are handled and counted inside the run."""
    result = ORCHESTRATOR.run()
    if not result.ok:
        logger.info("Digest run aborted: %s", result.error)


@router.get("/api", response_class=PlainTextResponse)
def trigger_run(background_tasks: BackgroundTasks):
    """Schedule one detached run and acknowledge immediately."""
    background_tasks.add_task(run_digest)
    return TRIGGER_ACK


@router.get("/stats", response_model=StatsSnapshot)
def get_stats():
    """Return the current counters."""
    return ORCHESTRATOR.context.snapshot()
