"""
Request logging middleware.

Every request produces one log line of the form
``| GET | /coffees | 200 | 0.42ms |`` on the ``coffee_shop_api.access``
logger once the response has been produced.
"""

import logging
import time

from fastapi import FastAPI, Request

from coffee_shop_api.app.core.logging_config import ACCESS_LOGGER

logger = logging.getLogger(ACCESS_LOGGER)


def register_request_logging(app: FastAPI) -> None:
    """Attach the access-log middleware to ``app``."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "| %s | %s | %d | %.2fms |",
            request.method,
            request.url.path,
            response.status_code,
            latency_ms,
        )
        return response
