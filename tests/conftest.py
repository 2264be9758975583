"""Shared pytest configuration and fixtures for all tests."""

import importlib
import logging

import pytest

from pathslash import PosixFlavour, WindowsFlavour, reset_flavour
from pathslash.constants import ENV_FLAVOUR, ENV_LOG_LEVEL


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external resources")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test against default configuration and a fresh active flavour."""
    monkeypatch.delenv(ENV_FLAVOUR, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)
    reset_flavour()
    yield
    reset_flavour()


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch):
    """Undo handlers and levels that configure_logging attaches."""
    module = importlib.import_module("pathslash.utils.configure_logging")
    logger = logging.getLogger("pathslash")
    handlers = list(logger.handlers)
    level = logger.level
    monkeypatch.setattr(module, "_CONFIGURED", False)
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


# =============================================================================
# Flavours
# =============================================================================


@pytest.fixture
def posix() -> PosixFlavour:
    return PosixFlavour()


@pytest.fixture
def windows() -> WindowsFlavour:
    return WindowsFlavour()
