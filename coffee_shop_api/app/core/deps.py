"""
FastAPI dependencies resolving the services attached to the app.

``create_app`` stores one ``CatalogService`` and one ``OrderService``
on ``app.state``; route handlers receive them through ``Depends`` so
that each application instance works against its own stores.
"""

from fastapi import Request

from coffee_shop_api.app.services.catalog_service import CatalogService
from coffee_shop_api.app.services.order_service import OrderService


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service
