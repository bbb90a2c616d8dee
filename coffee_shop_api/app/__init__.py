"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``core`` (configuration, logging, stores, errors),
``schemas`` (Pydantic models), ``services`` (business logic) and
``api`` (versioned routers).
"""

from .main import app, create_app  # noqa: F401
