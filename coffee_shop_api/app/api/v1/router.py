"""
Top-level router for version 1 of the API.

This router aggregates the domain routers (coffees, orders).  When new
domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import coffees, orders

router = APIRouter()

router.include_router(coffees.router, prefix="/coffees", tags=["coffees"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
