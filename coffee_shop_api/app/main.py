"""
Main entrypoint for the Coffee Shop API.

This module assembles the FastAPI application: it sets up logging,
builds the in-memory catalog and order ledger, wires the services
around them and includes the versioned routers.  ``create_app`` does
the work and is called once at import time to produce ``app``, so the
service can be run with uvicorn or another ASGI server, e.g.::

    uvicorn coffee_shop_api.app.main:app --port 8080
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import register_request_logging
from .core.store import build_catalog, build_ledger
from .services.catalog_service import CatalogService
from .services.order_service import OrderService


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call builds fresh stores, so two applications never share
    orders.  Tests rely on this to start each case from the sample
    data.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    catalog = build_catalog(seed=settings.seed_sample_data)
    ledger = build_ledger(seed=settings.seed_sample_data)
    app.state.catalog = catalog
    app.state.ledger = ledger
    app.state.catalog_service = CatalogService(catalog)
    app.state.order_service = OrderService(
        app.state.catalog_service,
        ledger,
        delivery_minutes=settings.delivery_minutes,
    )

    register_exception_handlers(app)
    register_request_logging(app)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def welcome() -> str:
        return "welcome!"

    app.include_router(v1_router, prefix=settings.api_prefix.rstrip("/"))

    return app


app = create_app()
