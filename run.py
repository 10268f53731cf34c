"""Entry point for the Contractor Registry API.

Starts the FastAPI application with Uvicorn.  Host, port, log level
and storage location are read from environment variables (see
``contractor_registry.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from contractor_registry.app.core.config import settings
from contractor_registry.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    logging.getLogger(__name__).info(
        "Starting %s on %s:%s (storage: %s)",
        settings.project_name,
        settings.host,
        settings.port,
        settings.storage_backend,
    )
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
