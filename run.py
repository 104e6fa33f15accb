"""Entry point for the donation API server.

Starts the FastAPI application under Uvicorn.  Host, port and log
level come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``);
see ``donation_tracker/app/core/config.py`` for every supported
variable.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from donation_tracker.app.core.config import settings
from donation_tracker.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "%s is running on http://%s:%s (health check at /health)",
        settings.project_name,
        settings.host,
        settings.port,
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
