import os
import sys

import uvicorn

from swapi_digest.cli import apply_cli_args
from swapi_digest.config import settings
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="server")

DEFAULT_PORT = 3000


def main(argv=None) -> None:
    """Apply CLI flags, configure logging and serve the app."""
    apply_cli_args(settings, sys.argv[1:] if argv is None else argv)
    setup_logging(level=settings.log_level, job_name="swapi_digest")

    # imported after flags are applied so the orchestrator sees the final settings
    from swapi_digest.main import app

    port = int(os.getenv("PORT", DEFAULT_PORT))
    logger.info(f"Server running at http://localhost:{port}/")
    logger.info("Open the URL in your browser and click the button to fetch Star Wars data")
    if settings.debug:
        logger.info("Debug mode: ON")
        logger.info(f"Timeout: {settings.timeout_ms} ms")

    uvicorn.run(app, host=settings.host, port=port, reload=False)


if __name__ == "__main__":
    main()
