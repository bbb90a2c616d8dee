"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration, listening on port 8080 with
the sample catalog loaded.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Coffee Shop API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is installed.
    log_file: str = os.getenv("LOG_FILE", "")

    # Write one access-log line per request on the
    # ``coffee_shop_api.access`` logger.
    access_log: bool = _env_flag("ACCESS_LOG", "true")

    # Prefix under which the coffee and order routes are mounted.  Left
    # empty so that paths are ``/coffees`` and ``/orders`` exactly; set
    # e.g. ``API_PREFIX=/api/v1`` to nest them.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Minutes added to an order's creation time to produce its
    # ``estimated_delivery``.
    delivery_minutes: int = int(os.getenv("DELIVERY_MINUTES", "10"))

    # Load the three sample coffees and the sample order at startup.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes defaults at import time, environment variables should be
# set before importing this module.
settings = Settings()
