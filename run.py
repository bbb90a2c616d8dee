"""Entry point for the Coffee Shop API.

Serves the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``8080``); see ``coffee_shop_api/app/core/config.py`` for the
other supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from coffee_shop_api.app.core.config import settings
from coffee_shop_api.app.main import app


async def main() -> None:
    """Run the API server until interrupted."""
    logging.getLogger(__name__).info("Coffee Shop API starting on %s:%d", settings.host, settings.port)
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
