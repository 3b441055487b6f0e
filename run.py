"""Entry point for the Tienda API.

Serves the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables through
``Settings``; the database location comes from ``DATABASE_URL``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from tienda_api.app.core.config import settings
from tienda_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn."""
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
    logging.getLogger(__name__).info("Starting Tienda API on %s:%s", settings.host, settings.port)
    await run_api()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
