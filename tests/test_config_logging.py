"""Tests for settings parsing and logging setup."""

import logging
from contextlib import contextmanager

from coffee_shop_api.app.core import config
from coffee_shop_api.app.core.config import Settings
from coffee_shop_api.app.core.logging_config import ACCESS_LOGGER, setup_logging


def test_env_flag(monkeypatch):
    monkeypatch.setenv("SOME_FLAG", "Yes")
    assert config._env_flag("SOME_FLAG", "false") is True

    monkeypatch.setenv("SOME_FLAG", "0")
    assert config._env_flag("SOME_FLAG", "true") is False

    monkeypatch.delenv("SOME_FLAG")
    assert config._env_flag("SOME_FLAG", "true") is True


def test_settings_overrides():
    settings = Settings(api_prefix="", port=8080, delivery_minutes=10, access_log=False)

    assert settings.api_prefix == ""
    assert settings.port == 8080
    assert settings.delivery_minutes == 10
    assert settings.access_log is False


@contextmanager
def isolated_loggers():
    """Empty the root and access handler lists, restoring them on exit."""
    root = logging.getLogger()
    access = logging.getLogger(ACCESS_LOGGER)
    saved_root, root_level = root.handlers[:], root.level
    saved_access, access_level, propagate = access.handlers[:], access.level, access.propagate
    root.handlers.clear()
    access.handlers.clear()
    try:
        yield root, access
    finally:
        for handler in root.handlers + access.handlers:
            handler.close()
        root.handlers[:] = saved_root
        root.setLevel(root_level)
        access.handlers[:] = saved_access
        access.setLevel(access_level)
        access.propagate = propagate


def _names(logger):
    return sorted(h.get_name() for h in logger.handlers)


def test_log_level_applies_to_root():
    with isolated_loggers() as (root, _):
        setup_logging(Settings(log_level="debug", log_file=""))
        assert root.level == logging.DEBUG

        setup_logging(Settings(log_level="nonsense", log_file=""))
        assert root.level == logging.INFO


def test_access_logger_has_own_handler_and_does_not_propagate():
    with isolated_loggers() as (root, access):
        setup_logging(Settings(log_file="", access_log=True))

        assert access.propagate is False
        assert access.level == logging.INFO
        assert _names(access) == ["coffee_shop_api.access.console"]
        assert _names(root) == ["coffee_shop_api.console"]
        assert access.handlers[0].formatter.datefmt == "%Y/%m/%d %H:%M:%S"


def test_access_log_disabled_raises_level():
    with isolated_loggers() as (_, access):
        setup_logging(Settings(log_file="", access_log=False))

        assert not access.isEnabledFor(logging.INFO)


def test_repeated_setup_does_not_duplicate_handlers():
    with isolated_loggers() as (root, access):
        setup_logging(Settings(log_file=""))
        setup_logging(Settings(log_file=""))

        assert len(root.handlers) == 1
        assert len(access.handlers) == 1


def test_log_file_receives_both_streams(tmp_path):
    logfile = tmp_path / "coffee.log"

    with isolated_loggers() as (root, access):
        setup_logging(Settings(log_file=str(logfile), access_log=True))
        logging.getLogger("coffee_shop_api.test").info("hello")
        access.info("| GET | /coffees | 200 | 0.10ms |")
        for handler in root.handlers + access.handlers:
            handler.flush()

    text = logfile.read_text(encoding="utf-8")
    assert "[INFO] coffee_shop_api.test: hello" in text
    assert "| GET | /coffees | 200 | 0.10ms |" in text
    assert "[INFO] coffee_shop_api.access" not in text
