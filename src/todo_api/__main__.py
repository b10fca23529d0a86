"""
Run the todo API server.

Usage:
    python -m todo_api

Configuration comes from environment variables, see todo_api.settings.
"""
from __future__ import annotations

import logging
import sys

import uvicorn

from .errors import StartupError
from .logging_config import configure_logging
from .main import create_app
from .settings import get_settings

logger = logging.getLogger("todo_api")


# PUBLIC_INTERFACE
def main() -> None:
    """Load the store, then serve until interrupted. Exits with status 1 if the store is unreadable."""
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        app = create_app(settings)
    except StartupError as e:
        logger.error("%s", e.message)
        sys.exit(1)

    logger.info("Server starting on %s:%d (store: %s)", settings.host, settings.port, settings.todos_file)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
