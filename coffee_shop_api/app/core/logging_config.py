"""
Logging configuration for the Coffee Shop API.

Two streams are configured from ``Settings``:

* the application log on the root logger, at ``LOG_LEVEL``, written to
  the console and, when ``LOG_FILE`` is set, to that file;
* the access log on ``coffee_shop_api.access``, one
  ``| METHOD | path | status | latency |`` line per request in the
  ``2025/03/03 15:30:45 | GET | ...`` layout, enabled by ``ACCESS_LOG``.
  It has its own handlers and does not propagate, so access lines are
  not duplicated in the application log format.

Handlers installed here are named, and ``setup_logging`` only adds the
ones that are missing, so calling it once per ``create_app`` is safe
and never stacks duplicate handlers.  Levels are re-applied each call.
"""

import logging
from pathlib import Path

from coffee_shop_api.app.core.config import Settings

ACCESS_LOGGER = "coffee_shop_api.access"

APP_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
APP_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ACCESS_FORMAT = "%(asctime)s %(message)s"
ACCESS_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

_APP_CONSOLE = "coffee_shop_api.console"
_APP_FILE = "coffee_shop_api.file"
_ACCESS_CONSOLE = "coffee_shop_api.access.console"
_ACCESS_FILE = "coffee_shop_api.access.file"


def _level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names give INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _install(logger: logging.Logger, name: str, fmt: str, datefmt: str, logfile: str = "") -> None:
    """Attach handler ``name`` to ``logger`` unless it is already there."""
    if any(h.get_name() == name for h in logger.handlers):
        return
    if logfile:
        handler: logging.Handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    logger.addHandler(handler)


def setup_logging(settings: Settings) -> None:
    """Configure the application and access loggers from ``settings``."""
    root = logging.getLogger()
    root.setLevel(_level(settings.log_level))
    _install(root, _APP_CONSOLE, APP_FORMAT, APP_DATE_FORMAT)
    if settings.log_file:
        _install(root, _APP_FILE, APP_FORMAT, APP_DATE_FORMAT, settings.log_file)

    access = logging.getLogger(ACCESS_LOGGER)
    access.propagate = False
    access.setLevel(logging.INFO if settings.access_log else logging.WARNING)
    _install(access, _ACCESS_CONSOLE, ACCESS_FORMAT, ACCESS_DATE_FORMAT)
    if settings.log_file:
        _install(access, _ACCESS_FILE, ACCESS_FORMAT, ACCESS_DATE_FORMAT, settings.log_file)
