"""Process entry point.

Usage:
    python -m signup_dashboard
    signup-dashboard

Exit codes:
    0: Server stopped normally
    1: Configuration missing or invalid
"""

from __future__ import annotations

import logging
import sys

import uvicorn

from signup_dashboard.api.app import create_app
from signup_dashboard.config import ConfigError, load_settings

logger = logging.getLogger("signup_dashboard")


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )


def main() -> int:
    setup_logging()

    try:
        settings = load_settings()
        app = create_app(settings=settings)
    except ConfigError as e:
        logger.error("Cannot start: %s", e)
        return 1

    logger.info("Dashboard running on http://localhost:%d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
