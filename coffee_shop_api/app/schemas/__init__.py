"""
Pydantic schema definitions for API payloads.

Each domain (coffees, orders) defines its own Pydantic models for
request and response bodies.  The same models are held by the
in-memory stores, so what the API returns is exactly what was stored.
"""
