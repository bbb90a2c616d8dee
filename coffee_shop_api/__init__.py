"""
Top-level package for the Coffee Shop API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``coffee_shop_api.app.main:app``.
"""

__all__ = []
